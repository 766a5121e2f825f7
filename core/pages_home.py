from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, List

from core.models import Snapshot


def _items(items: tuple) -> List[Dict[str, Any]]:
    return [asdict(i) for i in items]


def compute_home(snapshot: Snapshot) -> Dict[str, Any]:
    site = snapshot.site
    return {
        "website_last_updated": site.website_last_updated,
        "hours_last_updated": site.hours_last_updated,
        "upcoming_events": _items(site.events),
        "links": _items(site.links),
        "info_updates": _items(site.info_updates),
        "changelog": _items(site.changelog),
        "splash_texts": list(site.splash_texts),
    }


def compute_officers(snapshot: Snapshot) -> Dict[str, Any]:
    return {"officers": [asdict(o) for o in snapshot.officers]}


def compute_suggestions(snapshot: Snapshot) -> Dict[str, Any]:
    return {
        "text": snapshot.site.suggestions_text,
        "button_url": snapshot.site.suggestions_url,
        "available": bool(snapshot.site.suggestions_text or snapshot.site.suggestions_url),
    }
