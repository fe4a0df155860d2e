"""Where: src/segpath/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to the domain layer without file I/O.
Assumptions: - Config defaults remain compatible with current runtime expectations.
Trade-offs: - Invalid values fall back to defaults instead of failing startup.
"""

from __future__ import annotations

from segpath.config.config import DEFAULT_SEPARATORS, config as app_config


def _valid_separators(value: object) -> bool:
    """Return True when ``value`` is usable as an accepted separator set."""

    if not isinstance(value, str) or not value:
        return False
    if len(set(value)) != len(value):
        return False
    return all(ord(c) >= 32 and c not in '"<>|' for c in value)


_separators = getattr(app_config, "separators", DEFAULT_SEPARATORS)

# Accepted separator characters; the first one is canonical.
SEPARATORS: str = _separators if _valid_separators(_separators) else DEFAULT_SEPARATORS


__all__ = ["SEPARATORS"]
