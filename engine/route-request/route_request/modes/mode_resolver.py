"""
route_request/modes/mode_resolver.py

Purpose:
    Resolve a set of qualified modes into street modes per journey phase
    (access / egress / direct / transfer) and the allowed transit modes.

Notes:
    - Table driven and stateless: the same qualified-mode set always gives the same result.
    - One non-walk street mode drives the phases (BICYCLE > SCOOTER > CAR); WALK is always implied.
    - FLEX + ACCESS/EGRESS/DIRECT overrides a single phase after the table lookup.
    - An empty transit set means "transit disabled" for a request that sent modes at all.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from route_request.contracts.enums import ApiRequestMode, Qualifier, StreetMode, TransitMode
from route_request.contracts.errors import InvalidArgument
from route_request.modes.qualified_mode import (
    TRANSPORT_MODES_ARGUMENT,
    QualifiedMode,
    is_street_mode,
)


@dataclass(frozen=True)
class PhaseModeSet:
    access: StreetMode
    egress: StreetMode
    direct: StreetMode
    transfer: StreetMode
    transit_modes: frozenset[TransitMode]

    @property
    def transit_disabled(self) -> bool:
        return not self.transit_modes


W = StreetMode.WALK

# (mode, qualifier) -> (access, egress, direct, transfer)
_PHASE_TABLE: dict[tuple[ApiRequestMode, Optional[Qualifier]], tuple[StreetMode, StreetMode, StreetMode, StreetMode]] = {
    (ApiRequestMode.WALK, None): (W, W, W, W),
    (ApiRequestMode.BICYCLE, None): (StreetMode.BIKE, StreetMode.BIKE, StreetMode.BIKE, StreetMode.BIKE),
    (ApiRequestMode.BICYCLE, Qualifier.RENT): (
        StreetMode.BIKE_RENTAL, StreetMode.BIKE_RENTAL, StreetMode.BIKE_RENTAL, W,
    ),
    (ApiRequestMode.BICYCLE, Qualifier.PARK): (StreetMode.BIKE_TO_PARK, W, StreetMode.BIKE_TO_PARK, W),
    (ApiRequestMode.SCOOTER, Qualifier.RENT): (
        StreetMode.SCOOTER_RENTAL, StreetMode.SCOOTER_RENTAL, StreetMode.SCOOTER_RENTAL, W,
    ),
    (ApiRequestMode.CAR, None): (W, W, StreetMode.CAR, W),
    (ApiRequestMode.CAR, Qualifier.RENT): (
        StreetMode.CAR_RENTAL, StreetMode.CAR_RENTAL, StreetMode.CAR_RENTAL, W,
    ),
    (ApiRequestMode.CAR, Qualifier.PARK): (StreetMode.CAR_TO_PARK, W, StreetMode.CAR_TO_PARK, W),
    (ApiRequestMode.CAR, Qualifier.PICKUP): (W, StreetMode.CAR_PICKUP, StreetMode.CAR_PICKUP, W),
    (ApiRequestMode.CAR, Qualifier.DROPOFF): (StreetMode.CAR_PICKUP, W, StreetMode.CAR_PICKUP, W),
}

# When one street mode carries several qualifiers, the first match here wins.
_QUALIFIER_PRIORITY: tuple[Qualifier, ...] = (
    Qualifier.RENT,
    Qualifier.PARK,
    Qualifier.PICKUP,
    Qualifier.DROPOFF,
)

# When several street modes are requested, the first one present here drives the phases.
_STREET_MODE_PRIORITY: tuple[ApiRequestMode, ...] = (
    ApiRequestMode.BICYCLE,
    ApiRequestMode.SCOOTER,
    ApiRequestMode.CAR,
)


def resolve_modes(qualified_modes: Iterable[QualifiedMode]) -> PhaseModeSet:
    modes = frozenset(qualified_modes)

    street_mode = _primary_street_mode(modes)
    qualifiers = {qm.qualifier for qm in modes if qm.mode == street_mode and qm.qualifier is not None}
    access, egress, direct, transfer = _lookup(street_mode, qualifiers)

    for qm in modes:
        if qm.mode != ApiRequestMode.FLEX:
            continue
        if qm.qualifier == Qualifier.ACCESS:
            access = StreetMode.FLEXIBLE
        elif qm.qualifier == Qualifier.EGRESS:
            egress = StreetMode.FLEXIBLE
        elif qm.qualifier == Qualifier.DIRECT:
            direct = StreetMode.FLEXIBLE

    transit_modes = frozenset(tm for qm in modes for tm in qm.transit_modes)

    return PhaseModeSet(
        access=access,
        egress=egress,
        direct=direct,
        transfer=transfer,
        transit_modes=transit_modes,
    )


def _primary_street_mode(modes: frozenset[QualifiedMode]) -> ApiRequestMode:
    requested = {qm.mode for qm in modes if is_street_mode(qm.mode)}
    for mode in _STREET_MODE_PRIORITY:
        if mode in requested:
            return mode
    return ApiRequestMode.WALK


def _lookup(
    mode: ApiRequestMode, qualifiers: set[Qualifier]
) -> tuple[StreetMode, StreetMode, StreetMode, StreetMode]:
    for q in _QUALIFIER_PRIORITY:
        if q in qualifiers and (mode, q) in _PHASE_TABLE:
            return _PHASE_TABLE[(mode, q)]

    plain = _PHASE_TABLE.get((mode, None))
    if plain is None:
        raise InvalidArgument(
            argument=TRANSPORT_MODES_ARGUMENT,
            message=f"{mode.value} is only supported as a rental mode (qualifier RENT)",
        )
    return plain
