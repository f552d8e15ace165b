"""Shared utilities — date handling and constants used across layers.

No business logic and no I/O live here; any layer may import it.
"""
