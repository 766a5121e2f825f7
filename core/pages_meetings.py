from __future__ import annotations

from dataclasses import asdict
from datetime import date
from typing import Any, Dict, List, Tuple

from core.filters import MeetingFilters
from core.models import MeetingInfo, Snapshot


def _recent_first(meetings: List[MeetingInfo]) -> List[MeetingInfo]:
    # Undated meetings go last, in sheet order.
    def key(m: MeetingInfo) -> Tuple[int, int]:
        if m.raw_date is None:
            return (1, 0)
        return (0, -m.raw_date.toordinal())

    return sorted(meetings, key=key)


def meeting_row(m: MeetingInfo) -> Dict[str, Any]:
    row = asdict(m)
    row["raw_date"] = m.raw_date.isoformat() if isinstance(m.raw_date, date) else None
    return row


def compute_meetings(filters: MeetingFilters, snapshot: Snapshot) -> Dict[str, Any]:
    all_meetings = list(snapshot.meetings)
    titles = sorted({m.title for m in all_meetings})
    dates: List[str] = []
    for m in _recent_first(all_meetings):
        if m.date not in dates:
            dates.append(m.date)

    meetings = all_meetings
    if filters.title:
        meetings = [m for m in meetings if m.title == filters.title]
    if filters.date:
        meetings = [m for m in meetings if m.date == filters.date]

    return {
        "filters": asdict(filters),
        "titles": titles,
        "dates": dates,
        "meetings": [meeting_row(m) for m in _recent_first(meetings)],
    }
