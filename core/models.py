"""Immutable domain model built from one workbook load.

Everything here is a frozen dataclass with tuple collections; the parser
assembles these once and nothing downstream mutates them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Optional, Tuple

from core.diagnostics import Diagnostic


DEFAULT_SUBJECT_COLOR = "#6B7280"
DEFAULT_COURSE_COLOR = "#4B5563"


# ---------------- Hours ----------------
@dataclass(frozen=True)
class DailyHourEntry:
    date: date
    session: str  # "AM" | "PM"
    hours: float
    semester: int


@dataclass(frozen=True)
class AdditionalHourEntry:
    date: date
    hours: float
    semester: int
    notes: str = ""


@dataclass(frozen=True)
class Member:
    name: str
    semester1_hours: float = 0.0
    semester2_hours: float = 0.0
    daily_details: Tuple[DailyHourEntry, ...] = ()
    additional_details: Tuple[AdditionalHourEntry, ...] = ()

    @property
    def total_hours(self) -> float:
        return self.semester1_hours + self.semester2_hours


@dataclass(frozen=True)
class SemesterCalendar:
    sem1_start: Optional[date] = None
    sem2_start: Optional[date] = None
    sem2_end: Optional[date] = None

    def semester_for(self, day: date) -> Optional[int]:
        """Bucket a date: start boundaries inclusive, sem-2 end exclusive.

        Returns None for dates outside both semesters.
        """
        if self.sem2_start is not None and day >= self.sem2_start:
            if self.sem2_end is not None and day >= self.sem2_end:
                return None
            return 2
        if self.sem1_start is not None and day >= self.sem1_start:
            return 1
        return None


# ---------------- Taxonomy ----------------
@dataclass(frozen=True)
class Course:
    name: str
    color: str
    subject_id: str


@dataclass(frozen=True)
class Subject:
    id: str
    name: str
    color: str
    courses: Tuple[Course, ...] = ()
    _by_name: Dict[str, Course] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        lookup: Dict[str, Course] = {}
        for course in self.courses:
            lookup.setdefault(course.name.lower(), course)
        object.__setattr__(self, "_by_name", lookup)

    def find_course(self, name: str) -> Optional[Course]:
        return self._by_name.get(name.strip().lower())


@dataclass(frozen=True)
class Taxonomy:
    subjects: Tuple[Subject, ...] = ()

    def find_course(self, name: str) -> Optional[Tuple[Subject, Course]]:
        """First subject owning ``name`` (case-insensitive) and its course."""
        for subject in self.subjects:
            course = subject.find_course(name)
            if course is not None:
                return subject, course
        return None

    def find_subject(self, name: str) -> Optional[Subject]:
        key = name.strip().lower()
        for subject in self.subjects:
            if subject.name.lower() == key:
                return subject
        return None

    def subject_by_id(self, subject_id: str) -> Optional[Subject]:
        for subject in self.subjects:
            if subject.id == subject_id:
                return subject
        return None


@dataclass(frozen=True)
class SubjectProficiency:
    subject_id: str
    subject_name: str
    subject_color: str
    courses: Tuple[Course, ...] = ()

    @property
    def count(self) -> int:
        return len(self.courses)


@dataclass(frozen=True)
class MemberProficiency:
    id: str
    name: str
    subjects: Tuple[SubjectProficiency, ...] = ()


# ---------------- Study resources ----------------
@dataclass(frozen=True)
class GeneralTag:
    id: str
    name: str


@dataclass(frozen=True)
class ResourceSubject:
    id: str
    name: str
    color: str


@dataclass(frozen=True)
class ResourceCourse:
    name: str
    color: str
    subject_id: str


@dataclass(frozen=True)
class StudyResource:
    id: str
    name: str
    description: str
    download_link: Optional[str] = None
    general_tags: Tuple[GeneralTag, ...] = ()
    subjects: Tuple[ResourceSubject, ...] = ()
    courses: Tuple[ResourceCourse, ...] = ()


# ---------------- Meetings / officers / site ----------------
@dataclass(frozen=True)
class MeetingInfo:
    id: str
    title: str
    date: str
    raw_date: Optional[date]
    start_time: str
    end_time: str
    length: str
    notes: str


@dataclass(frozen=True)
class Officer:
    id: str
    name: str
    role: str
    email: str
    description: str
    image: str
    secondary_image: Optional[str] = None


@dataclass(frozen=True)
class ListItem:
    id: str
    date: str = ""
    title: str = ""
    text: str = ""
    url: str = ""


@dataclass(frozen=True)
class SiteInfo:
    website_last_updated: str = "N/A"
    hours_last_updated: str = "N/A"
    calendar: SemesterCalendar = field(default_factory=SemesterCalendar)
    events: Tuple[ListItem, ...] = ()
    links: Tuple[ListItem, ...] = ()
    info_updates: Tuple[ListItem, ...] = ()
    changelog: Tuple[ListItem, ...] = ()
    suggestions_text: Optional[str] = None
    suggestions_url: Optional[str] = None
    splash_texts: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Snapshot:
    site: SiteInfo
    members: Tuple[Member, ...] = ()
    officers: Tuple[Officer, ...] = ()
    taxonomy: Taxonomy = field(default_factory=Taxonomy)
    member_proficiencies: Tuple[MemberProficiency, ...] = ()
    general_tags: Tuple[GeneralTag, ...] = ()
    study_resources: Tuple[StudyResource, ...] = ()
    meetings: Tuple[MeetingInfo, ...] = ()
    sheet_names: Tuple[str, ...] = ()

    def find_member(self, name: str) -> Optional[Member]:
        for member in self.members:
            if member.name == name:
                return member
        return None


@dataclass(frozen=True)
class ParseResult:
    snapshot: Snapshot
    diagnostics: Tuple[Diagnostic, ...] = ()
