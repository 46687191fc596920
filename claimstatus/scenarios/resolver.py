from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..schemas import ClaimRecord, PendingDetermination
from .determinations import DeterminationClassifier
from .types import ScenarioType

BASE_SCENARIOS = frozenset(
    {ScenarioType.BASE_NO_WEEKS_TO_CERTIFY, ScenarioType.BASE_WEEKS_TO_CERTIFY}
)


def _continue_certifying(scenario: ScenarioType, has_certification_weeks_available: bool | None) -> bool:
    return scenario not in BASE_SCENARIOS and bool(has_certification_weeks_available)


def continue_certifying(scenario: ScenarioType, claim: ClaimRecord) -> bool:
    """Whether the status should include the "continue certifying" content."""
    return _continue_certifying(scenario, claim.has_certification_weeks_available)


@dataclass(slots=True, frozen=True)
class ScenarioResult:
    scenario: ScenarioType
    determination: PendingDetermination | None = None
    has_certification_weeks_available: bool | None = None

    @property
    def continue_certifying(self) -> bool:
        return _continue_certifying(self.scenario, self.has_certification_weeks_available)

    def to_dict(self) -> dict[str, Any]:
        return {
            "scenario": self.scenario.value,
            "scenario_name": self.scenario.description,
            "continue_certifying": self.continue_certifying,
            "determination": self.determination.to_dict() if self.determination else None,
        }


class ScenarioResolver:
    def __init__(self, classifier: DeterminationClassifier | None = None) -> None:
        self.classifier = classifier or DeterminationClassifier()

    def resolve(self, claim: ClaimRecord) -> ScenarioResult:
        if claim.pending_determinations:
            found = self.classifier.identify_scenario(claim.pending_determinations)
            if found is not None:
                return ScenarioResult(
                    scenario=found.scenario,
                    determination=found.determination,
                    has_certification_weeks_available=claim.has_certification_weeks_available,
                )

        if claim.has_pending_weeks is True:
            scenario = ScenarioType.PENDING_WEEKS
        elif claim.has_certification_weeks_available is False:
            scenario = ScenarioType.BASE_NO_WEEKS_TO_CERTIFY
        else:
            scenario = ScenarioType.BASE_WEEKS_TO_CERTIFY

        return ScenarioResult(
            scenario=scenario,
            has_certification_weeks_available=claim.has_certification_weeks_available,
        )


def get_scenario(claim: ClaimRecord, classifier: DeterminationClassifier | None = None) -> ScenarioResult:
    return ScenarioResolver(classifier=classifier).resolve(claim)
