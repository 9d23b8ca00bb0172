"""HTTP API for md2slack."""
