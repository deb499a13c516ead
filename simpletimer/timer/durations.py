"""Duration choices and ``HH:MM`` parsing / formatting.

Durations are whole seconds.  The user-facing form is always a
two-digit ``HH:MM`` string, so the largest expressible value is 99:59.
"""

from __future__ import annotations

import re

from .errors import InvalidFormat


# ── constants ─────────────────────────────────────────────────────────────

PRESETS: tuple[str, ...] = ("00:15", "00:30", "00:45", "01:00")
CUSTOM_CHOICE = "Custom…"
DEFAULT_LABEL = "01:00"

MAX_SECONDS = 99 * 3600 + 59 * 60  # 99:59

_HHMM_RE = re.compile(r"^\d{2}:\d{2}$")


# ── parsing ───────────────────────────────────────────────────────────────


def parse_hhmm(text: str) -> tuple[int, int]:
    """Split a strict ``HH:MM`` string into ``(hours, minutes)``.

    Surrounding whitespace is ignored.  Raises ``InvalidFormat`` when the
    text is not two digits, a colon, two digits, or when the minutes are
    60 or more.
    """
    trimmed = text.strip()
    # re's \d also matches non-ASCII digits
    if not _HHMM_RE.match(trimmed) or not trimmed.isascii():
        raise InvalidFormat(text)
    hh, mm = (int(part) for part in trimmed.split(":"))
    if not 0 <= mm <= 59:
        raise InvalidFormat(text)
    return hh, mm


def is_valid_hhmm(text: str) -> bool:
    try:
        parse_hhmm(text)
    except InvalidFormat:
        return False
    return True


def hhmm_to_seconds(text: str) -> int:
    hh, mm = parse_hhmm(text)
    return hh * 3600 + mm * 60


# ── formatting ────────────────────────────────────────────────────────────


def seconds_to_hhmm(seconds: int) -> str:
    """Format *seconds* as zero-padded ``HH:MM`` (negative clamps to 0)."""
    clamped = max(0, seconds)
    hh, rest = divmod(clamped, 3600)
    return f"{hh:02d}:{rest // 60:02d}"
