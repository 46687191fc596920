from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any

from ..schemas import PendingDetermination
from .dates import MIN_VALID_DATE, is_date_past, is_valid_date, parse_convert_date
from .time_slot import is_first_time_slot_earlier
from .types import ScenarioType

NON_PENDING_DETERMINATION_VALUES = frozenset(
    {"Canceled", "Complete", "TRAN", "INVL", "IDNC", "1277", "OTHR", "ClmCX"}
)


class DeterminationState(Enum):
    PENDING_SCHEDULED = "pending_scheduled"
    PENDING_AWAITING_DECISION = "pending_awaiting_decision"
    NOT_YET_SCHEDULED = "not_yet_scheduled"
    IGNORED = "ignored"


@dataclass(slots=True, frozen=True)
class DeterminationScenario:
    scenario: ScenarioType
    determination: PendingDetermination | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "scenario": self.scenario.value,
            "determination": self.determination.to_dict() if self.determination else None,
        }


def is_scheduled_strictly_before(first: PendingDetermination, second: PendingDetermination) -> bool:
    """Return True if ``first`` is scheduled before ``second``.

    Both schedule dates must already be valid. Same-day appointments are
    ordered by time slot; an undecidable slot comparison counts as not before.
    """
    first_date = parse_convert_date(first.schedule_date)
    second_date = parse_convert_date(second.schedule_date)
    if first_date is None or second_date is None:
        return False

    if first_date.date() < second_date.date():
        return True
    if first_date.date() > second_date.date():
        return False
    return bool(
        is_first_time_slot_earlier(first.time_slot_description, second.time_slot_description)
    )


class DeterminationClassifier:
    def __init__(
        self,
        non_pending_values: Iterable[str] = NON_PENDING_DETERMINATION_VALUES,
        min_valid_date: datetime = MIN_VALID_DATE,
        today: date | None = None,
    ) -> None:
        self.non_pending_values = frozenset(non_pending_values)
        self.min_valid_date = min_valid_date
        self.today = today

    def is_status_pending(self, determination: PendingDetermination) -> bool:
        status = determination.determination_status
        return not status or status not in self.non_pending_values

    def classify(self, determination: PendingDetermination) -> DeterminationState:
        if self.is_status_pending(determination) and is_valid_date(
            determination.schedule_date, min_date=self.min_valid_date
        ):
            if is_date_past(determination.schedule_date, today=self.today):
                return DeterminationState.PENDING_AWAITING_DECISION
            return DeterminationState.PENDING_SCHEDULED

        if (
            not determination.determination_status
            and not determination.schedule_date
            and determination.request_date
        ):
            return DeterminationState.NOT_YET_SCHEDULED

        return DeterminationState.IGNORED

    def identify_scenario(
        self, determinations: Iterable[PendingDetermination]
    ) -> DeterminationScenario | None:
        earliest_scheduled: PendingDetermination | None = None
        has_awaiting_decision = False
        has_not_yet_scheduled = False

        for determination in determinations:
            state = self.classify(determination)
            if state is DeterminationState.PENDING_SCHEDULED:
                if earliest_scheduled is None or is_scheduled_strictly_before(
                    determination, earliest_scheduled
                ):
                    earliest_scheduled = determination
            elif state is DeterminationState.PENDING_AWAITING_DECISION:
                has_awaiting_decision = True
            elif state is DeterminationState.NOT_YET_SCHEDULED:
                has_not_yet_scheduled = True

        if earliest_scheduled is not None:
            return DeterminationScenario(
                scenario=ScenarioType.DETERMINATION_SCHEDULED,
                determination=earliest_scheduled,
            )
        if has_awaiting_decision:
            return DeterminationScenario(scenario=ScenarioType.DETERMINATION_AWAITING_DECISION)
        if has_not_yet_scheduled:
            return DeterminationScenario(scenario=ScenarioType.DETERMINATION_NOT_YET_SCHEDULED)
        return None
