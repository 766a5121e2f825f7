from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional


@dataclass(frozen=True)
class HoursFilters:
    search: str = ""


@dataclass(frozen=True)
class MemberFilters:
    search: str = ""
    subject_ids: List[str] = field(default_factory=list)
    course_names: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ResourceFilters:
    search: str = ""
    general_tag_ids: List[str] = field(default_factory=list)
    subject_ids: List[str] = field(default_factory=list)
    course_names: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class MeetingFilters:
    title: Optional[str] = None
    date: Optional[str] = None


def _as_str_list(values: Optional[Iterable[object]]) -> List[str]:
    if not values:
        return []
    out: List[str] = []
    for v in values:
        if v is None:
            continue
        s = str(v).strip()
        if s and s not in out:
            out.append(s)
    return out


def _as_optional_str(value: object) -> Optional[str]:
    if value is None:
        return None
    s = str(value).strip()
    if not s or s.lower() == "all":
        return None
    return s


def normalize_hours_filters(raw: dict) -> HoursFilters:
    return HoursFilters(search=(raw.get("search") or "").strip())


def normalize_member_filters(raw: dict) -> MemberFilters:
    return MemberFilters(
        search=(raw.get("search") or "").strip(),
        subject_ids=_as_str_list(raw.get("subject_ids")),
        course_names=_as_str_list(raw.get("course_names")),
    )


def normalize_resource_filters(raw: dict) -> ResourceFilters:
    return ResourceFilters(
        search=(raw.get("search") or "").strip(),
        general_tag_ids=_as_str_list(raw.get("general_tag_ids")),
        subject_ids=_as_str_list(raw.get("subject_ids")),
        course_names=_as_str_list(raw.get("course_names")),
    )


def normalize_meeting_filters(raw: dict) -> MeetingFilters:
    return MeetingFilters(title=_as_optional_str(raw.get("title")), date=_as_optional_str(raw.get("date")))


def course_filter_for_subject(course_names: List[str], subject_course_names: Iterable[str]) -> set:
    """Selected course names (lower-cased) that belong to one subject.

    An empty result means the subject filter is not narrowed to courses.
    """
    wanted = {c.lower() for c in course_names}
    return {name.lower() for name in subject_course_names if name.lower() in wanted}
