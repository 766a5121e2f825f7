from __future__ import annotations

import logging
import math

import numpy as np
import pandas as pd
from fastapi import FastAPI
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.schemas import (
    HoursFiltersModel,
    MeetingFiltersModel,
    MemberFiltersModel,
    ResourceFiltersModel,
    StatusResponse,
)
from core.data import get_workbook_source, load_snapshot
from core.diagnostics import ERROR, WARNING
from core.filters import (
    normalize_hours_filters,
    normalize_meeting_filters,
    normalize_member_filters,
    normalize_resource_filters,
)
from core.pages_debug import compute_debug
from core.pages_home import compute_home, compute_officers, compute_suggestions
from core.pages_hours import compute_hours, compute_member_hours
from core.pages_meetings import compute_meetings
from core.pages_members import compute_members
from core.pages_resources import compute_resources


app = FastAPI(title="Club Hub API", version="0.1.0")
logger = logging.getLogger(__name__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _json(data: object) -> JSONResponse:
    """Return JSON with safe encoding for pandas/numpy objects."""

    def _safe_float(value: object) -> float | None:
        try:
            out = float(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return None
        if math.isnan(out) or math.isinf(out):
            return None
        return out

    return JSONResponse(
        content=jsonable_encoder(
            data,
            custom_encoder={
                type(pd.NA): lambda _: None,
                np.integer: int,
                float: _safe_float,
                np.floating: _safe_float,
                np.bool_: bool,
                pd.Timestamp: lambda ts: ts.isoformat(),
            },
        )
    )


def _error(exc: Exception, status_code: int = 500) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": str(exc), "type": type(exc).__name__})


@app.get("/meta/status", response_model=StatusResponse)
def meta_status():
    try:
        result = load_snapshot()
        return StatusResponse(
            source=get_workbook_source(),
            sheet_names=list(result.snapshot.sheet_names),
            members=len(result.snapshot.members),
            warnings=sum(1 for d in result.diagnostics if d.level == WARNING),
            errors=sum(1 for d in result.diagnostics if d.level == ERROR),
        )
    except Exception as exc:
        logger.exception("meta_status failed")
        return _error(exc)


@app.get("/home")
def home():
    try:
        return _json(compute_home(load_snapshot().snapshot))
    except Exception as exc:
        logger.exception("home failed")
        return _error(exc)


@app.post("/hours")
def hours(filters: HoursFiltersModel):
    try:
        snapshot = load_snapshot().snapshot
        f = normalize_hours_filters(filters.model_dump())
        return _json(compute_hours(f, snapshot))
    except Exception as exc:
        logger.exception("hours failed")
        return _error(exc)


@app.get("/hours/{member_name}")
def member_hours(member_name: str):
    try:
        payload = compute_member_hours(load_snapshot().snapshot, member_name)
    except Exception as exc:
        logger.exception("member_hours failed")
        return _error(exc)
    if payload is None:
        return JSONResponse(status_code=404, content={"error": f"Member {member_name!r} not found", "type": "NotFound"})
    return _json(payload)


@app.get("/officers")
def officers():
    try:
        return _json(compute_officers(load_snapshot().snapshot))
    except Exception as exc:
        logger.exception("officers failed")
        return _error(exc)


@app.post("/members")
def members(filters: MemberFiltersModel):
    try:
        snapshot = load_snapshot().snapshot
        f = normalize_member_filters(filters.model_dump())
        return _json(compute_members(f, snapshot))
    except Exception as exc:
        logger.exception("members failed")
        return _error(exc)


@app.post("/resources")
def resources(filters: ResourceFiltersModel):
    try:
        snapshot = load_snapshot().snapshot
        f = normalize_resource_filters(filters.model_dump())
        return _json(compute_resources(f, snapshot))
    except Exception as exc:
        logger.exception("resources failed")
        return _error(exc)


@app.post("/meetings")
def meetings(filters: MeetingFiltersModel):
    try:
        snapshot = load_snapshot().snapshot
        f = normalize_meeting_filters(filters.model_dump())
        return _json(compute_meetings(f, snapshot))
    except Exception as exc:
        logger.exception("meetings failed")
        return _error(exc)


@app.get("/suggestions")
def suggestions():
    try:
        return _json(compute_suggestions(load_snapshot().snapshot))
    except Exception as exc:
        logger.exception("suggestions failed")
        return _error(exc)


@app.get("/debug")
def debug():
    try:
        return _json(compute_debug(load_snapshot()))
    except Exception as exc:
        logger.exception("debug failed")
        return _error(exc)
