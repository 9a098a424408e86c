"""Internal utilities for Stillpoint.

This module contains private implementation details:
    - constants: library defaults and magic numbers
    - calendar: proleptic Gregorian calendar helpers

Submodules are imported directly (``stillpoint._internal.calendar``).

Note: This module is not part of the public API.
"""

from __future__ import annotations

__all__: list[str] = []
