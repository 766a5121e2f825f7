"""Resolve free-text course, subject and tag names against the taxonomy."""

from __future__ import annotations

from typing import Dict, List, Optional, Set, Tuple

from core.diagnostics import Diagnostics
from core.grid import SheetGrid
from core.models import (
    Course,
    GeneralTag,
    MemberProficiency,
    ResourceCourse,
    ResourceSubject,
    StudyResource,
    Subject,
    SubjectProficiency,
    Taxonomy,
)
from core.normalize import slugify, split_list


PROFICIENCY_START_ROW = 5  # Excel row 6

TAG_ROW = 0
RESOURCE_START_ROW = 3  # Excel row 4
RES_NAME_COL = 1
RES_DESCRIPTION_COL = 2
RES_SUBJECTS_COL = 3
RES_COURSES_COL = 4
RES_LINK_COL = 5
RES_TAGS_COL = 6


def parse_member_proficiencies(grid: Optional[SheetGrid], taxonomy: Taxonomy, diags: Diagnostics) -> Tuple[MemberProficiency, ...]:
    if grid is None:
        diags.warn("MemberDetails sheet not found; member proficiencies are unavailable.")
        return ()
    if grid.n_rows <= PROFICIENCY_START_ROW:
        diags.warn("MemberDetails sheet has too few rows (member data starts at row 6).", sheet=grid.name)
        return ()

    out: List[MemberProficiency] = []
    for row in range(PROFICIENCY_START_ROW, grid.n_rows):
        name = grid.text(row, 0)
        if not name:
            continue

        by_subject: Dict[str, Tuple[Subject, List[Course]]] = {}
        for col in range(1, grid.row_len(row)):
            course_name = grid.text(row, col)
            if not course_name:
                continue
            match = taxonomy.find_course(course_name)
            if match is None:
                diags.warn(
                    f"Course {course_name!r} listed for member {name!r} is not in any subject on the Subjects sheet; ignored.",
                    sheet=grid.name,
                    row=row,
                    col=col,
                )
                continue
            subject, course = match
            _, courses = by_subject.setdefault(subject.id, (subject, []))
            if course not in courses:
                courses.append(course)

        subjects: List[SubjectProficiency] = []
        for subject, courses in by_subject.values():
            subjects.append(
                SubjectProficiency(
                    subject_id=subject.id,
                    subject_name=subject.name,
                    subject_color=subject.color,
                    courses=tuple(courses),
                )
            )
        out.append(MemberProficiency(id=f"memberProf-{row}", name=name, subjects=tuple(subjects)))
    return tuple(out)


def parse_general_tags(grid: SheetGrid) -> Tuple[GeneralTag, ...]:
    """Tag catalog from row 1, columns B onward; duplicates by id dropped."""
    tags: List[GeneralTag] = []
    seen: Set[str] = set()
    for col in range(1, grid.row_len(TAG_ROW)):
        name = grid.text(TAG_ROW, col)
        if not name:
            continue
        tag_id = slugify(name)
        if tag_id in seen:
            continue
        seen.add(tag_id)
        tags.append(GeneralTag(id=tag_id, name=name))
    return tuple(tags)


def parse_study_resources(
    grid: Optional[SheetGrid], taxonomy: Taxonomy, diags: Diagnostics
) -> Tuple[Tuple[GeneralTag, ...], Tuple[StudyResource, ...]]:
    if grid is None:
        diags.warn("StudyResources sheet not found; the study resources page will be empty.")
        return (), ()

    catalog = parse_general_tags(grid)
    tags_by_name = {tag.name.lower(): tag for tag in catalog}
    if grid.n_rows <= RESOURCE_START_ROW:
        diags.warn("StudyResources sheet has no resource rows (resources start at row 4).", sheet=grid.name)
        return catalog, ()

    resources: List[StudyResource] = []
    for row in range(RESOURCE_START_ROW, grid.n_rows):
        name = grid.text(row, RES_NAME_COL)
        if not name:
            continue

        subjects: List[ResourceSubject] = []
        courses: List[ResourceCourse] = []
        added: Set[str] = set()

        for tag in split_list(grid.value(row, RES_SUBJECTS_COL)):
            subject = taxonomy.find_subject(tag)
            if subject is None:
                diags.warn(f"Resource {name!r}: subject tag {tag!r} not found.", sheet=grid.name, row=row, col=RES_SUBJECTS_COL)
                continue
            if subject.id not in added:
                subjects.append(ResourceSubject(id=subject.id, name=subject.name, color=subject.color))
                added.add(subject.id)

        for course_name in split_list(grid.value(row, RES_COURSES_COL)):
            match = taxonomy.find_course(course_name)
            if match is None:
                diags.warn(
                    f"Resource {name!r}: course tag {course_name!r} not found in any subject.",
                    sheet=grid.name,
                    row=row,
                    col=RES_COURSES_COL,
                )
                continue
            subject, course = match
            courses.append(ResourceCourse(name=course.name, color=course.color, subject_id=subject.id))
            if subject.id not in added:
                subjects.append(ResourceSubject(id=subject.id, name=subject.name, color=subject.color))
                added.add(subject.id)

        general: List[GeneralTag] = []
        for tag_name in split_list(grid.value(row, RES_TAGS_COL)):
            tag = tags_by_name.get(tag_name.lower())
            if tag is None:
                diags.warn(
                    f"Resource {name!r}: general tag {tag_name!r} is not in the tag list on row 1.",
                    sheet=grid.name,
                    row=row,
                    col=RES_TAGS_COL,
                )
                continue
            if tag not in general:
                general.append(tag)

        resources.append(
            StudyResource(
                id=f"resource-{row}",
                name=name,
                description=grid.text(row, RES_DESCRIPTION_COL) or "No description provided.",
                download_link=grid.optional_text(row, RES_LINK_COL),
                general_tags=tuple(general),
                subjects=tuple(subjects),
                courses=tuple(courses),
            )
        )
    return catalog, tuple(resources)
