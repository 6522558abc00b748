"""Introspection fragment matcher"""

from __future__ import annotations

from asyncio import (
    CancelledError,
    Future,
    Task,
    ensure_future,
    get_running_loop,
    shield,
)
from enum import Enum
from typing import Any, Awaitable, Callable, Optional, Union

import structlog

from ..error import FetchError, PrematureUseError
from ..pyutils import AwaitableOrValue, Missing, is_awaitable
from ..store import IdValue, ReadStoreContext
from ..utilities import (
    POSSIBLE_TYPES_QUERY,
    IntrospectionQuery,
    PossibleTypesMap,
    build_possible_types_map,
    get_introspection_data,
)

try:
    from typing import TypeAlias
except ImportError:  # Python < 3.10
    from typing_extensions import TypeAlias

__all__ = ["IntrospectionFragmentMatcher", "QueryExecutor", "ReadinessState"]

log = structlog.get_logger()

QueryExecutor: TypeAlias = Callable[[str], AwaitableOrValue[Any]]
"""Executes a query document and returns its result or an awaitable of it"""


class ReadinessState(Enum):
    """State of the possible types of a fragment matcher"""

    UNINITIALIZED = "uninitialized"
    PENDING = "pending"
    READY = "ready"


class IntrospectionFragmentMatcher:
    """Fragment matcher using the possible types of the schema.

    Decides whether a record in a normalized store satisfies the type condition of a
    fragment. For unions and interfaces this requires knowing the possible types of
    the abstract type, which are taken from an introspection result.

    The introspection result can be passed when creating the matcher. Otherwise it
    is fetched once with :meth:`ensure_ready`, which must be done before the matcher
    can be used. Concurrent calls of :meth:`ensure_ready` share the same fetch.
    """

    __slots__ = "_fetch_task", "_possible_types", "_ready_future", "_state"

    _state: ReadinessState
    _possible_types: Optional[PossibleTypesMap]
    _ready_future: Optional[Future[None]]
    _fetch_task: Optional[Task[None]]

    def __init__(
        self, introspection_query_result_data: Optional[IntrospectionQuery] = None
    ) -> None:
        self._ready_future = self._fetch_task = None
        if introspection_query_result_data is None:
            self._possible_types = None
            self._state = ReadinessState.UNINITIALIZED
        else:
            self._possible_types = build_possible_types_map(
                introspection_query_result_data
            )
            self._state = ReadinessState.READY

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self._state.value}>"

    @property
    def state(self) -> ReadinessState:
        return self._state

    @property
    def is_ready(self) -> bool:
        return self._state is ReadinessState.READY

    @property
    def possible_types(self) -> Optional[PossibleTypesMap]:
        """The possible types of all abstract types, or None if not yet ready"""
        return self._possible_types

    def ensure_ready(self, execute_query: QueryExecutor) -> Future[None]:
        """Make sure that the possible types are known.

        Returns a future that resolves when the matcher is ready. If the possible
        types are not known yet, they are fetched by passing the introspection query
        to the given query executor. While a fetch is in flight, all callers wait
        for the same fetch and the executor is not called again. Every caller gets
        its own future for this, so a caller giving up on waiting (e.g. after a
        timeout) does not cancel the fetch for the others. Once ready, this returns
        an already resolved future.

        If the fetch fails, the future is rejected with a :exc:`FetchError` and the
        matcher is reset, so that a later call can retry.

        Must be called while an event loop is running.
        """
        state = self._state
        if state is ReadinessState.PENDING:
            return shield(self._ready_future)  # type: ignore
        future: Future[None] = get_running_loop().create_future()
        if state is ReadinessState.READY:
            future.set_result(None)
            return future

        # Nothing may be awaited before the shared future has been stored.
        # It is only handed out shielded, so that only the fetch can settle it.
        self._state = ReadinessState.PENDING
        self._ready_future = future
        log.debug("introspection_fetch_started")
        try:
            result = execute_query(POSSIBLE_TYPES_QUERY)
            if is_awaitable(result):
                self._fetch_task = ensure_future(self._await_result(result, future))
                return shield(future)
            self._complete(result)
        except Exception as error:
            future.set_exception(self._fail(error))
        else:
            future.set_result(None)
        return future

    def match(
        self,
        id_value: Union[IdValue, str],
        type_condition: str,
        context: ReadStoreContext,
    ) -> bool:
        """Check whether the referenced record matches the type condition.

        The type condition can be the name of a concrete type or of an abstract
        type. Abstract types that are unknown to the schema do not match any record.
        Records that do not exist or do not have a type name do not match either.

        Raises a :exc:`PrematureUseError` if the matcher is not ready yet.
        """
        if self._state is not ReadinessState.READY:
            raise PrematureUseError(
                f"{self.__class__.__name__}.match() was called"
                " before ensure_ready() was done."
            )
        typename = context.get_typename(id_value)
        if typename is Missing:
            return False
        if not typename:
            context.has_missing_field = True
            return False
        if typename == type_condition:
            return True
        return self._possible_types.is_possible_type(  # type: ignore
            type_condition, typename
        )

    async def _await_result(self, result: Awaitable, future: Future[None]) -> None:
        try:
            result = await result
            self._complete(result)
        except CancelledError:
            self._reset()
            future.cancel()
            raise
        except Exception as error:
            future.set_exception(self._fail(error))
        else:
            future.set_result(None)

    def _complete(self, result: Any) -> None:
        possible_types = build_possible_types_map(get_introspection_data(result))
        self._possible_types = possible_types
        self._state = ReadinessState.READY
        self._ready_future = self._fetch_task = None
        log.info("possible_types_ready", abstract_types=len(possible_types))

    def _fail(self, error: Exception) -> FetchError:
        self._reset()
        log.warning("introspection_fetch_failed", exc_info=True)
        if isinstance(error, FetchError):
            return error
        return FetchError(
            f"Cannot fetch the possible types: {error}", original_error=error
        )

    def _reset(self) -> None:
        self._state = ReadinessState.UNINITIALIZED
        self._ready_future = self._fetch_task = None
