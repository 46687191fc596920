from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from typing import Any

# Hyphen, en dash or em dash between two 1-2 digit hours.
TIME_SLOT_PATTERN = re.compile(r"(\d{1,2})[-–—](\d{1,2})")

# Claim office hours: 8-12 are morning, 1-7 are afternoon/evening.
LAST_PM_HOUR = 7


@dataclass(slots=True, frozen=True)
class TimeSlot:
    range_start: int
    range_end: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _is_hour(value: int) -> bool:
    return 1 <= value <= 12


def parse_time_slot(text: str | None) -> TimeSlot | None:
    if not isinstance(text, str):
        return None
    match = TIME_SLOT_PATTERN.fullmatch(text.strip())
    if not match:
        return None
    start, end = int(match.group(1)), int(match.group(2))
    if not (_is_hour(start) and _is_hour(end)):
        return None
    return TimeSlot(range_start=start, range_end=end)


def is_pm(hour: int) -> bool:
    return 1 <= hour <= LAST_PM_HOUR


def same_period(first_hour: int, second_hour: int) -> bool:
    return is_pm(first_hour) == is_pm(second_hour)


def is_first_time_slot_earlier(first: str | None, second: str | None) -> bool | None:
    """Compare the start of two time slot descriptions.

    Returns None when neither slot parses. A slot that parses is treated as
    earlier than one that does not, whichever side it is on. Identical starts
    are not earlier.
    """
    first_slot = parse_time_slot(first)
    second_slot = parse_time_slot(second)

    if first_slot is None and second_slot is None:
        return None
    if second_slot is None:
        return True
    if first_slot is None:
        return False

    first_start = first_slot.range_start
    second_start = second_slot.range_start
    if same_period(first_start, second_start):
        return first_start < second_start
    # Different periods: the morning slot comes first.
    return not is_pm(first_start)


def describe_time_slot(slot: TimeSlot) -> str:
    start_suffix = "p.m." if is_pm(slot.range_start) else "a.m."
    end_suffix = "p.m." if is_pm(slot.range_end) else "a.m."
    # A slot ending at 12 closes at noon.
    if slot.range_end == 12:
        end_suffix = "p.m."
    if start_suffix == end_suffix:
        return f"{slot.range_start}-{slot.range_end} {end_suffix}"
    return f"{slot.range_start} {start_suffix}-{slot.range_end} {end_suffix}"
