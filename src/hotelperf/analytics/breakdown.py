"""Per room type and per channel performance."""

import uuid
from collections import Counter, defaultdict
from typing import Callable, Sequence

from hotelperf.analytics.common import ZERO, checked_in_during, is_paid, nights, pct, safe_div, sum_amounts
from hotelperf.domain.models.inventory import ReportPeriod, Reservation, Room
from hotelperf.domain.models.kpi import BreakdownRow

UNASSIGNED_ROOM_TYPE = "unassigned"


def _group(
    reservations: Sequence[Reservation],
    period: ReportPeriod,
    key_fn: Callable[[Reservation], str],
) -> dict[str, list[Reservation]]:
    groups: dict[str, list[Reservation]] = defaultdict(list)
    for r in checked_in_during(reservations, period):
        if is_paid(r):
            groups[key_fn(r)].append(r)
    return groups


def _rows(
    groups: dict[str, list[Reservation]],
    available_for: Callable[[str], int],
) -> list[BreakdownRow]:
    total_revenue = sum((sum_amounts(members) for members in groups.values()), ZERO)
    rows = []
    for key in sorted(groups):
        members = groups[key]
        revenue = sum_amounts(members)
        room_nights = sum(nights(r) for r in members)
        rows.append(BreakdownRow(
            key=key,
            bookings=len(members),
            revenue=revenue,
            room_nights=room_nights,
            average_rate=safe_div(revenue, len(members)),
            adr=safe_div(revenue, room_nights),
            occupancy_rate=pct(room_nights, available_for(key)),
            revenue_share=pct(revenue, total_revenue),
        ))
    return rows


def by_room_type(
    reservations: Sequence[Reservation],
    rooms: Sequence[Room],
    period: ReportPeriod,
    include_empty: bool = False,
) -> list[BreakdownRow]:
    """Group paid reservations by the type of the room they occupy.

    Reservations pointing at a room missing from ``rooms`` land in the
    ``unassigned`` group, which has no inventory and so 0 occupancy.
    With ``include_empty`` every room type of the catalog gets a row.
    """
    room_types: dict[uuid.UUID, str] = {room.id: room.room_type for room in rooms}
    rooms_per_type = Counter(room_types.values())

    groups = _group(
        reservations,
        period,
        lambda r: room_types.get(r.room_id, UNASSIGNED_ROOM_TYPE),
    )
    if include_empty:
        for room_type in rooms_per_type:
            groups.setdefault(room_type, [])

    return _rows(groups, lambda key: rooms_per_type.get(key, 0) * period.days)


def by_channel(
    reservations: Sequence[Reservation],
    period: ReportPeriod,
    room_count: int = 0,
) -> list[BreakdownRow]:
    """Group paid reservations by booking source ('direct' when absent).

    Channels own no rooms; when ``room_count`` is given, occupancy is the
    channel's share of the property's available room-nights, else 0.
    """
    groups = _group(reservations, period, lambda r: r.channel)
    return _rows(groups, lambda _key: room_count * period.days)
