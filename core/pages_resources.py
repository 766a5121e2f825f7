from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict

from core.filters import ResourceFilters, course_filter_for_subject
from core.models import Snapshot, StudyResource, Taxonomy
from core.pages_members import subject_options


def matches_resource(resource: StudyResource, filters: ResourceFilters, taxonomy: Taxonomy) -> bool:
    if filters.search:
        q = filters.search.lower()
        if q not in resource.name.lower() and q not in resource.description.lower():
            return False
    if filters.general_tag_ids:
        if not any(tag.id in filters.general_tag_ids for tag in resource.general_tags):
            return False
    if not filters.subject_ids:
        return True
    for subject_id in filters.subject_ids:
        if not any(s.id == subject_id for s in resource.subjects):
            continue
        subject = taxonomy.subject_by_id(subject_id)
        wanted = course_filter_for_subject(filters.course_names, [c.name for c in subject.courses] if subject else [])
        if not wanted:
            return True
        if any(c.subject_id == subject_id and c.name.lower() in wanted for c in resource.courses):
            return True
    return False


def resource_card(resource: StudyResource) -> Dict[str, Any]:
    return {
        "id": resource.id,
        "name": resource.name,
        "description": resource.description,
        "download_link": resource.download_link,
        "general_tags": [asdict(t) for t in resource.general_tags],
        "subjects": [asdict(s) for s in resource.subjects],
        "courses": [asdict(c) for c in resource.courses],
    }


def compute_resources(filters: ResourceFilters, snapshot: Snapshot) -> Dict[str, Any]:
    resources = [r for r in snapshot.study_resources if matches_resource(r, filters, snapshot.taxonomy)]
    return {
        "filters": asdict(filters),
        "general_tags": [asdict(t) for t in snapshot.general_tags],
        "subjects": subject_options(snapshot.taxonomy),
        "resources": [resource_card(r) for r in resources],
        "total": len(snapshot.study_resources),
    }
