# route_request/modes/qualified_mode.py
# Purpose: (mode, qualifier) pairs parsed from `transportModes` records, plus mode categories.

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Optional

from route_request.contracts.enums import ApiRequestMode, Qualifier, TransitMode
from route_request.contracts.errors import InvalidArgument

TRANSPORT_MODES_ARGUMENT = "transportModes"

STREET_MODES: frozenset[ApiRequestMode] = frozenset(
    {ApiRequestMode.WALK, ApiRequestMode.BICYCLE, ApiRequestMode.SCOOTER, ApiRequestMode.CAR}
)

_TRANSIT_MODES_BY_API_MODE: dict[ApiRequestMode, tuple[TransitMode, ...]] = {
    ApiRequestMode.TRAM: (TransitMode.TRAM,),
    ApiRequestMode.SUBWAY: (TransitMode.SUBWAY,),
    ApiRequestMode.RAIL: (TransitMode.RAIL,),
    ApiRequestMode.BUS: (TransitMode.BUS,),
    ApiRequestMode.COACH: (TransitMode.COACH,),
    ApiRequestMode.FERRY: (TransitMode.FERRY,),
    ApiRequestMode.CABLE_CAR: (TransitMode.CABLE_CAR,),
    ApiRequestMode.GONDOLA: (TransitMode.GONDOLA,),
    ApiRequestMode.FUNICULAR: (TransitMode.FUNICULAR,),
    ApiRequestMode.AIRPLANE: (TransitMode.AIRPLANE,),
    ApiRequestMode.TROLLEYBUS: (TransitMode.TROLLEYBUS,),
    ApiRequestMode.MONORAIL: (TransitMode.MONORAIL,),
    ApiRequestMode.CARPOOL: (TransitMode.CARPOOL,),
    ApiRequestMode.TAXI: (TransitMode.TAXI,),
    ApiRequestMode.TRANSIT: tuple(TransitMode),
}


def transit_modes_of(mode: ApiRequestMode) -> tuple[TransitMode, ...]:
    return _TRANSIT_MODES_BY_API_MODE.get(mode, ())


def is_street_mode(mode: ApiRequestMode) -> bool:
    return mode in STREET_MODES


@dataclass(frozen=True)
class QualifiedMode:
    mode: ApiRequestMode
    qualifier: Optional[Qualifier] = None

    @property
    def transit_modes(self) -> tuple[TransitMode, ...]:
        return transit_modes_of(self.mode)

    def __str__(self) -> str:
        return self.mode.value if self.qualifier is None else f"{self.mode.value}_{self.qualifier.value}"

    @classmethod
    def parse(cls, mode: Any, qualifier: Any = None) -> "QualifiedMode":
        return cls(mode=_parse_mode(mode), qualifier=_parse_qualifier(qualifier))


WALK = QualifiedMode(ApiRequestMode.WALK)


def parse_transport_modes(records: Iterable[Mapping[str, Any]]) -> frozenset[QualifiedMode]:
    """
    Parse `[{"mode": "BICYCLE", "qualifier": "RENT"}, {"mode": "BUS"}]` into a deduplicated
    set. WALK is always part of the result.
    """
    if isinstance(records, (str, bytes, Mapping)) or not isinstance(records, Iterable):
        raise InvalidArgument(
            argument=TRANSPORT_MODES_ARGUMENT,
            message=f"expected a list of mode records, got {type(records).__name__}",
        )

    out: set[QualifiedMode] = {WALK}
    for record in records:
        if not isinstance(record, Mapping):
            raise InvalidArgument(
                argument=TRANSPORT_MODES_ARGUMENT,
                message=f"mode records must be objects, got {type(record).__name__}",
            )
        out.add(QualifiedMode.parse(record.get("mode"), record.get("qualifier")))
    return frozenset(out)


def _parse_mode(raw: Any) -> ApiRequestMode:
    if isinstance(raw, ApiRequestMode):
        return raw
    if not isinstance(raw, str) or not raw.strip():
        raise InvalidArgument(argument=f"{TRANSPORT_MODES_ARGUMENT}.mode", message="mode is required", value=raw)
    try:
        return ApiRequestMode(raw.strip().upper())
    except ValueError:
        raise InvalidArgument(
            argument=f"{TRANSPORT_MODES_ARGUMENT}.mode",
            message=f"unknown mode '{raw}'",
            value=raw,
        ) from None


def _parse_qualifier(raw: Any) -> Optional[Qualifier]:
    if raw is None or isinstance(raw, Qualifier):
        return raw
    if not isinstance(raw, str):
        raise InvalidArgument(
            argument=f"{TRANSPORT_MODES_ARGUMENT}.qualifier",
            message="qualifier must be a string",
            value=raw,
        )
    if not raw.strip():
        return None
    try:
        return Qualifier(raw.strip().upper())
    except ValueError:
        raise InvalidArgument(
            argument=f"{TRANSPORT_MODES_ARGUMENT}.qualifier",
            message=f"unknown qualifier '{raw}'",
            value=raw,
        ) from None
