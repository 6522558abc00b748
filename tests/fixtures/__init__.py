"""Fixtures for fragment matcher tests"""

import json
from pathlib import Path

import pytest

__all__ = [
    "item_introspection_result",
    "item_store",
    "read_json",
    "star_wars_introspection_result",
]


def read_json(name):
    path = (Path(__file__).parent / name).with_suffix(".json")
    with path.open(encoding="utf-8") as file:
        return json.load(file)


@pytest.fixture
def item_introspection_result():
    return {
        "__schema": {
            "types": [
                {
                    "kind": "UNION",
                    "name": "Item",
                    "possibleTypes": [{"name": "ItemA"}, {"name": "ItemB"}],
                }
            ]
        }
    }


@pytest.fixture
def item_store():
    return {"a": {"__typename": "ItemB"}}


@pytest.fixture(scope="module")
def star_wars_introspection_result():
    return read_json("star_wars_possible_types")
