# route_request/filters/parking_filter.py
# Purpose: Tag-based vehicle parking filters (select / not) built from filter descriptors.

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

SELECT_KEY = "select"
NOT_KEY = "not"
TAGS_KEY = "tags"


class TagsFilter(BaseModel):
    """Matches a parking facility that carries every tag in `tags`."""

    model_config = ConfigDict(frozen=True)

    tags: frozenset[str] = frozenset()


class VehicleParkingFilterRequest(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    not_: frozenset[TagsFilter] = Field(default=frozenset(), alias="not")
    select: frozenset[TagsFilter] = frozenset()

    @property
    def is_empty(self) -> bool:
        return not self.not_ and not self.select


EMPTY_PARKING_FILTER = VehicleParkingFilterRequest()


def parse_parking_filters(descriptors: Iterable[Mapping[str, Any]]) -> VehicleParkingFilterRequest:
    """
    Build the two filter sets from descriptors shaped like
        [{"select": [{"tags": ["a", "b"]}]}, {"not": [{"tags": ["c"]}]}]

    Each `{"tags": [...]}` entry becomes one TagsFilter. A descriptor without `select`
    or `not` contributes nothing.
    """
    if isinstance(descriptors, (str, bytes, Mapping)) or not isinstance(descriptors, Iterable):
        raise TypeError(f"parking filters must be a list, got {type(descriptors).__name__}")

    items = list(descriptors)
    return VehicleParkingFilterRequest(
        not_=_parse_operation(items, NOT_KEY),
        select=_parse_operation(items, SELECT_KEY),
    )


def _parse_operation(descriptors: list[Any], key: str) -> frozenset[TagsFilter]:
    out: set[TagsFilter] = set()
    for descriptor in descriptors:
        if not isinstance(descriptor, Mapping):
            raise TypeError(f"parking filter must be an object, got {type(descriptor).__name__}")

        operations = descriptor.get(key)
        if operations is None:
            continue
        if not isinstance(operations, list):
            raise TypeError(f"'{key}' must be a list, got {type(operations).__name__}")

        for op in operations:
            if not isinstance(op, Mapping):
                raise TypeError(f"'{key}' entries must be objects, got {type(op).__name__}")
            tags = op.get(TAGS_KEY) or []
            if isinstance(tags, str) or not all(isinstance(t, str) for t in tags):
                raise TypeError("'tags' must be a list of strings")
            out.add(TagsFilter(tags=frozenset(tags)))
    return frozenset(out)
