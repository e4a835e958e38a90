"""
route_request/filters/transit_filter.py

Purpose:
    Transit selection filter: positive `select` selectors (allowed transport modes) and
    negative `not` selectors (banned routes / agencies / trips).

Notes:
    - A selector matches when all of its set criteria match; a criterion left as None is
      not part of the selector.
    - Empty `select` means "everything is selected". Matching any `not` selector excludes.
    - Evaluation belongs to the search layer. This module only builds the structure.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from route_request.arguments.path_resolver import ArgumentTree
from route_request.arguments.overlay import Binding, apply_all
from route_request.contracts.enums import TransitMode
from route_request.model.ids import FeedScopedId


class MainAndSubMode(BaseModel):
    model_config = ConfigDict(frozen=True)

    main_mode: TransitMode
    sub_mode: Optional[str] = None


class SelectRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    transport_modes: Optional[tuple[MainAndSubMode, ...]] = None
    agencies: Optional[tuple[FeedScopedId, ...]] = None
    routes: Optional[tuple[FeedScopedId, ...]] = None
    trips: Optional[tuple[FeedScopedId, ...]] = None


class TransitFilterRequest(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    select: tuple[SelectRequest, ...] = ()
    not_: tuple[SelectRequest, ...] = Field(default=(), alias="not")

    @property
    def allows_all(self) -> bool:
        return not self.select and not self.not_


ALLOW_ALL = TransitFilterRequest()


class TransitFilterBuilder:
    def __init__(self) -> None:
        self._select: list[SelectRequest] = []
        self._not: list[SelectRequest] = []

    def add_select(self, selector: SelectRequest) -> "TransitFilterBuilder":
        self._select.append(selector)
        return self

    def add_not(self, selector: SelectRequest) -> "TransitFilterBuilder":
        self._not.append(selector)
        return self

    def build(self) -> TransitFilterRequest:
        return TransitFilterRequest(select=tuple(self._select), not_=tuple(self._not))


def build_transit_filter(
    tree: ArgumentTree,
    transit_modes: Optional[Iterable[TransitMode]] = None,
) -> TransitFilterRequest:
    """
    Build the transit filter from `banned.*` and the resolved transit allow-list.

    transit_modes=None means no `transportModes` argument was sent (no select selector).
    Callers must not pass an empty allow-list; that case disables transit instead.
    """
    builder = TransitFilterBuilder()

    apply_all(
        tree,
        [
            Binding("banned.routes", lambda v: builder.add_not(SelectRequest(routes=FeedScopedId.parse_list(v)))),
            Binding("banned.agencies", lambda v: builder.add_not(SelectRequest(agencies=FeedScopedId.parse_list(v)))),
            Binding("banned.trips", lambda v: builder.add_not(SelectRequest(trips=FeedScopedId.parse_list(v)))),
        ],
    )

    if transit_modes is not None:
        modes = sorted(set(transit_modes), key=lambda m: m.value)
        if not modes:
            raise ValueError("empty transit allow-list; disable transit instead of filtering")
        builder.add_select(SelectRequest(transport_modes=tuple(MainAndSubMode(main_mode=m) for m in modes)))

    return builder.build()
