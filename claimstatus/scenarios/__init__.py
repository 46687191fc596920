from __future__ import annotations

from .dates import format_date, is_date_past, is_valid_date, parse_convert_date
from .determinations import (
    NON_PENDING_DETERMINATION_VALUES,
    DeterminationClassifier,
    DeterminationScenario,
    DeterminationState,
    is_scheduled_strictly_before,
)
from .resolver import ScenarioResolver, ScenarioResult, continue_certifying, get_scenario
from .time_slot import TimeSlot, is_first_time_slot_earlier, parse_time_slot, same_period
from .types import SCENARIO_DESCRIPTIONS, ScenarioType

__all__ = [
    "NON_PENDING_DETERMINATION_VALUES",
    "SCENARIO_DESCRIPTIONS",
    "DeterminationClassifier",
    "DeterminationScenario",
    "DeterminationState",
    "ScenarioResolver",
    "ScenarioResult",
    "ScenarioType",
    "TimeSlot",
    "continue_certifying",
    "format_date",
    "get_scenario",
    "is_date_past",
    "is_first_time_slot_earlier",
    "is_scheduled_strictly_before",
    "is_valid_date",
    "parse_convert_date",
    "parse_time_slot",
    "same_period",
]
