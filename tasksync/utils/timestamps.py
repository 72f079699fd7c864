"""
Horodatages : tout est stocké en UTC "naïf" (sans tzinfo), comme BaseModelDB,
et circule sur le fil au format RFC3339 (`2025-01-31T13:45:00.123Z`).
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Optional

# fraction de seconde de longueur quelconque (RFC3339Nano en a 9)
_FRACTION = re.compile(r"(\d{2}:\d{2}:\d{2})\.(\d+)")


def utcnow() -> datetime:
    """Heure UTC courante, naïve, tronquée à la milliseconde."""
    return from_millis(now_millis())


def now_millis() -> int:
    return int(datetime.now(timezone.utc).timestamp() * 1000)


def from_millis(ms: int) -> datetime:
    return datetime.fromtimestamp(ms / 1000, tz=timezone.utc).replace(tzinfo=None)


def to_utc_naive(value: datetime) -> datetime:
    """Normalise un datetime (aware ou naïf supposé UTC) en UTC naïf."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def _six_digit_fraction(match: re.Match) -> str:
    return f"{match.group(1)}.{match.group(2)[:6].ljust(6, '0')}"


def parse_rfc3339(value: Optional[str]) -> Optional[datetime]:
    """
    Parse une chaîne RFC3339 / ISO8601 en UTC naïf.
    Retourne None si la valeur est absente, illisible ou hors de la plage de datetime.
    La fraction de seconde est ramenée à 6 chiffres (microsecondes).
    """
    if value is None:
        return None
    s = value.strip()
    if not s:
        return None
    if s.endswith(("Z", "z")):
        s = s[:-1] + "+00:00"
    s = _FRACTION.sub(_six_digit_fraction, s, count=1)
    try:
        return to_utc_naive(datetime.fromisoformat(s))
    except (ValueError, OverflowError):
        return None


def format_rfc3339(value: Optional[datetime]) -> Optional[str]:
    """Formate un datetime UTC (naïf ou non) en RFC3339 avec suffixe `Z`."""
    if value is None:
        return None
    value = to_utc_naive(value)
    return value.isoformat(timespec="milliseconds") + "Z"
