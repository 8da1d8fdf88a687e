"""Best-effort "City, State" extraction from free-text addresses."""

from __future__ import annotations


def extract_location(address: str) -> str:
    """Return a short location for an address. Never raises.

    - exactly one comma: already "City, State", returned unchanged
    - no comma: the address, trimmed
    - two or more commas: second segment as city, first word of the third
      segment as state ("123 Main St, Springfield, IL 62704" -> "Springfield, IL")

    Empty city or state parts are dropped instead of leaving a dangling comma:
    "123 Main St, Springfield," -> "Springfield", "123 Main St, , IL 62704" -> "IL".
    """
    if address.count(",") == 1:
        return address

    segments = address.split(",")
    if len(segments) == 1:
        return segments[0].strip()

    city = segments[1].strip()
    state_words = segments[2].split()
    state = state_words[0] if state_words else ""
    return ", ".join(part for part in (city, state) if part)
