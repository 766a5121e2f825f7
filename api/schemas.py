from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class HoursFiltersModel(BaseModel):
    search: str = ""


class MemberFiltersModel(BaseModel):
    search: str = ""
    subject_ids: List[str] = Field(default_factory=list)
    course_names: List[str] = Field(default_factory=list)


class ResourceFiltersModel(BaseModel):
    search: str = ""
    general_tag_ids: List[str] = Field(default_factory=list)
    subject_ids: List[str] = Field(default_factory=list)
    course_names: List[str] = Field(default_factory=list)


class MeetingFiltersModel(BaseModel):
    title: Optional[str] = None
    date: Optional[str] = None


class StatusResponse(BaseModel):
    source: str
    sheet_names: List[str]
    members: int
    warnings: int
    errors: int
