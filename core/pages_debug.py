from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict

from core.diagnostics import ERROR, WARNING
from core.models import ParseResult


def compute_debug(result: ParseResult) -> Dict[str, Any]:
    snapshot = result.snapshot
    calendar = snapshot.site.calendar
    return {
        "sheet_names": list(snapshot.sheet_names),
        "calendar": {
            "sem1_start": calendar.sem1_start.isoformat() if calendar.sem1_start else None,
            "sem2_start": calendar.sem2_start.isoformat() if calendar.sem2_start else None,
            "sem2_end": calendar.sem2_end.isoformat() if calendar.sem2_end else None,
        },
        "row_counts": {
            "members": len(snapshot.members),
            "officers": len(snapshot.officers),
            "subjects": len(snapshot.taxonomy.subjects),
            "courses": sum(len(s.courses) for s in snapshot.taxonomy.subjects),
            "member_proficiencies": len(snapshot.member_proficiencies),
            "general_tags": len(snapshot.general_tags),
            "study_resources": len(snapshot.study_resources),
            "meetings": len(snapshot.meetings),
        },
        "diagnostic_counts": {
            "warnings": sum(1 for d in result.diagnostics if d.level == WARNING),
            "errors": sum(1 for d in result.diagnostics if d.level == ERROR),
        },
        "diagnostics": [asdict(d) for d in result.diagnostics],
    }
