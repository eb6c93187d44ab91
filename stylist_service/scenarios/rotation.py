"""
Rotation Index Calculator (v1.0.0)
Epoch-day modulo rotation for palettes and styling archetypes.

The day number is derived from wall-clock time rather than a PRNG, so a
given calendar day always yields the same palette/archetype pair without
any persisted state.
"""
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Union

MS_PER_DAY = 86_400_000

PALETTE_CYCLE = 21
DRESSY_ARCHETYPE_CYCLE = 13
CASUAL_ARCHETYPE_CYCLE = 7

# Offsets decorrelate the casual look from the dressy look on the same day
CASUAL_PALETTE_OFFSET = 7
CASUAL_ARCHETYPE_OFFSET = 2

Clock = Union[None, int, float, datetime]


@dataclass(frozen=True)
class RotationState:
    day_index: int
    palette_index: int
    archetype_index: int


def _epoch_ms(now: Clock) -> int:
    if now is None:
        return int(time.time() * 1000)
    if isinstance(now, datetime):
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        return int(now.timestamp() * 1000)
    return int(now * 1000)


def day_index(now: Clock = None) -> int:
    """
    Days elapsed since the Unix epoch (UTC), floored.

    Args:
        now: None for the wall clock, a datetime (naive is read as UTC)
             or epoch seconds
    """
    return _epoch_ms(now) // MS_PER_DAY


def palette_index(day: int) -> int:
    return day % PALETTE_CYCLE


def archetype_index(day: int) -> int:
    return day % DRESSY_ARCHETYPE_CYCLE


def casual_palette_index(day: int) -> int:
    return (day + CASUAL_PALETTE_OFFSET) % PALETTE_CYCLE


def casual_archetype_index(day: int) -> int:
    return (day % CASUAL_ARCHETYPE_CYCLE + CASUAL_ARCHETYPE_OFFSET) % CASUAL_ARCHETYPE_CYCLE


def dressy_rotation(day: int) -> RotationState:
    """Rotation for the primary (dressy) family."""
    return RotationState(day, palette_index(day), archetype_index(day))


def casual_rotation(day: int) -> RotationState:
    """Rotation for the secondary (casual) family."""
    return RotationState(day, casual_palette_index(day), casual_archetype_index(day))


def resolve_day(day: Optional[int] = None, now: Clock = None) -> int:
    """Use an explicit day number when given, otherwise derive it from the clock."""
    return day if day is not None else day_index(now)
