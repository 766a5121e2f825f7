"""HTTP API serving club hub page payloads."""
