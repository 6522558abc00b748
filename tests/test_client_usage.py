from typing import Any, Dict

from pytest import mark

import fragment_matcher
from fragment_matcher import (
    POSSIBLE_TYPES_QUERY,
    IdValue,
    IntrospectionFragmentMatcher,
    ReadStoreContext,
)

from .fixtures import star_wars_introspection_result  # noqa: F401


class Client:
    """Minimal client with a cache-first query executor."""

    def __init__(self, fragment_matcher: IntrospectionFragmentMatcher) -> None:
        self.fragment_matcher = fragment_matcher
        self.query_cache: Dict[str, Any] = {}
        self.store: Dict[str, Dict[str, Any]] = {}
        self.network_queries: list = []

    def write_query(self, query: str, data: Any) -> None:
        self.query_cache[query] = data

    def execute_query(self, query: str) -> Any:
        if query in self.query_cache:
            return self.query_cache[query]
        return self.fetch(query)

    async def fetch(self, query: str) -> Any:
        self.network_queries.append(query)
        raise RuntimeError("Must not fetch from server!")

    async def read_fragment(self, data_id: str, type_condition: str) -> bool:
        await self.fragment_matcher.ensure_ready(self.execute_query)
        return self.fragment_matcher.match(
            IdValue(data_id), type_condition, ReadStoreContext(self.store)
        )


def describe_client_usage():
    def exports_the_public_interface():
        for name in fragment_matcher.__all__:
            assert hasattr(fragment_matcher, name)

    @mark.asyncio
    async def does_not_need_to_fetch_if_introspection_result_is_cached(
        star_wars_introspection_result,
    ):
        client = Client(IntrospectionFragmentMatcher())
        client.write_query(POSSIBLE_TYPES_QUERY, star_wars_introspection_result)
        client.store["luke"] = {"__typename": "Human", "name": "Luke Skywalker"}

        assert await client.read_fragment("luke", "Character") is True
        assert await client.read_fragment("luke", "SearchResult") is True
        assert await client.read_fragment("luke", "Droid") is False
        assert client.network_queries == []
