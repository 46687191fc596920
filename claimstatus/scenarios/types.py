from __future__ import annotations

from enum import Enum


class ScenarioType(Enum):
    """Claim status scenarios, numbered to match the UI content spreadsheet."""

    DETERMINATION_NOT_YET_SCHEDULED = 1
    DETERMINATION_SCHEDULED = 2
    DETERMINATION_AWAITING_DECISION = 3
    PENDING_WEEKS = 4
    BASE_NO_WEEKS_TO_CERTIFY = 5
    BASE_WEEKS_TO_CERTIFY = 6

    @property
    def description(self) -> str:
        return SCENARIO_DESCRIPTIONS[self]

    @property
    def content_key(self) -> str:
        return f"scenario{self.value}"


SCENARIO_DESCRIPTIONS: dict[ScenarioType, str] = {
    ScenarioType.DETERMINATION_NOT_YET_SCHEDULED: "Determination interview: not yet scheduled",
    ScenarioType.DETERMINATION_SCHEDULED: "Determination interview: scheduled",
    ScenarioType.DETERMINATION_AWAITING_DECISION: "Determination interview: awaiting decision",
    ScenarioType.PENDING_WEEKS: "Generic pending state: pending weeks",
    ScenarioType.BASE_NO_WEEKS_TO_CERTIFY: "Base state: no pending weeks, no weeks to certify",
    ScenarioType.BASE_WEEKS_TO_CERTIFY: "Base state: no pending weeks, weeks to certify",
}
