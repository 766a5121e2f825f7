from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, List

from core.filters import MemberFilters, course_filter_for_subject
from core.models import MemberProficiency, Snapshot, Taxonomy


def subject_options(taxonomy: Taxonomy) -> List[Dict[str, Any]]:
    return [
        {
            "id": s.id,
            "name": s.name,
            "color": s.color,
            "courses": [{"name": c.name, "color": c.color} for c in s.courses],
        }
        for s in taxonomy.subjects
    ]


def matches_member(member: MemberProficiency, filters: MemberFilters, taxonomy: Taxonomy) -> bool:
    if filters.search and filters.search.lower() not in member.name.lower():
        return False
    if not filters.subject_ids:
        return True
    # Any selected subject may match; a subject narrowed to courses needs one of them.
    for subject_id in filters.subject_ids:
        prof = next((p for p in member.subjects if p.subject_id == subject_id), None)
        if prof is None:
            continue
        subject = taxonomy.subject_by_id(subject_id)
        wanted = course_filter_for_subject(filters.course_names, [c.name for c in subject.courses] if subject else [])
        if not wanted or any(c.name.lower() in wanted for c in prof.courses):
            return True
    return False


def proficiency_card(member: MemberProficiency) -> Dict[str, Any]:
    return {
        "id": member.id,
        "name": member.name,
        "subjects": [
            {
                "subject_id": p.subject_id,
                "subject_name": p.subject_name,
                "subject_color": p.subject_color,
                "count": p.count,
                "courses": [{"name": c.name, "color": c.color} for c in p.courses],
            }
            for p in member.subjects
        ],
    }


def compute_members(filters: MemberFilters, snapshot: Snapshot) -> Dict[str, Any]:
    members = [m for m in snapshot.member_proficiencies if matches_member(m, filters, snapshot.taxonomy)]
    return {
        "filters": asdict(filters),
        "subjects": subject_options(snapshot.taxonomy),
        "members": [proficiency_card(m) for m in members],
        "total": len(snapshot.member_proficiencies),
    }
