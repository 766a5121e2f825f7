from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, Optional

import pandas as pd

from core.charts import hours_by_member_chart
from core.dates import format_date_standard
from core.filters import HoursFilters
from core.models import Member, Snapshot


HOURS_HEADERS = ["Member Name", "Semester 1 Hours", "Semester 2 Hours", "Total Hours"]


def hours_frame(snapshot: Snapshot) -> pd.DataFrame:
    rows = [
        {
            "Member Name": m.name,
            "Semester 1 Hours": m.semester1_hours,
            "Semester 2 Hours": m.semester2_hours,
            "Total Hours": m.total_hours,
        }
        for m in snapshot.members
    ]
    return pd.DataFrame(rows, columns=HOURS_HEADERS)


def compute_hours(filters: HoursFilters, snapshot: Snapshot) -> Dict[str, Any]:
    df = hours_frame(snapshot)
    if filters.search and not df.empty:
        q = filters.search.lower()
        df = df[df["Member Name"].str.lower().str.contains(q, regex=False, na=False)]

    charts: Dict[str, Any] = {}
    if not df.empty:
        charts["hours_by_member"] = hours_by_member_chart(df)

    members = snapshot.members
    return {
        "filters": asdict(filters),
        "headers": HOURS_HEADERS,
        "rows": df.to_dict(orient="records"),
        "kpis": {
            "members": len(members),
            "semester1_hours": sum(m.semester1_hours for m in members),
            "semester2_hours": sum(m.semester2_hours for m in members),
            "total_hours": sum(m.total_hours for m in members),
        },
        "hours_last_updated": snapshot.site.hours_last_updated,
        "charts": charts,
    }


def member_hours_payload(member: Member) -> Dict[str, Any]:
    return {
        "member_name": member.name,
        "semester1_hours": member.semester1_hours,
        "semester2_hours": member.semester2_hours,
        "total_hours": member.total_hours,
        "daily_details": [
            {
                "date": format_date_standard(d.date),
                "session": d.session,
                "hours": d.hours,
                "semester": d.semester,
            }
            for d in member.daily_details
        ],
        "additional_details": [
            {
                "date": format_date_standard(a.date),
                "hours": a.hours,
                "notes": a.notes,
                "semester": a.semester,
            }
            for a in member.additional_details
        ],
    }


def compute_member_hours(snapshot: Snapshot, member_name: str) -> Optional[Dict[str, Any]]:
    member = snapshot.find_member(member_name)
    if member is None:
        return None
    return member_hours_payload(member)
