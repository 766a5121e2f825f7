"""Core (UI-agnostic) club hub logic.

This package contains:
- workbook decoding and per-sheet parsers (XLSX -> immutable Snapshot)
- workbook loading and caching (local file or URL)
- filter normalization
- page compute functions (JSON-serializable payloads)
- chart helpers (Altair -> Vega-Lite spec dict)
"""
