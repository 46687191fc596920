from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from .schemas import ClaimDetails, ClaimRecord, PendingDetermination
from .scenarios.dates import format_date, is_valid_date
from .scenarios.resolver import ScenarioResolver, ScenarioResult
from .scenarios.time_slot import TimeSlot, describe_time_slot, parse_time_slot
from .scenarios.types import ScenarioType

CONTINUE_CERTIFYING_KEY = "claim-status:your-next-steps.continue-certifying"

# Scenario 1-3 share the determination interview next steps.
_DETERMINATION_NEXT_STEPS = [
    "claim-status:your-next-steps.determination.prepare",
    "claim-status:your-next-steps.determination.upload-documents",
]
_DETERMINATION_EDD_NEXT_STEPS = ["claim-status:edd-next-steps.determination.review"]

YOUR_NEXT_STEPS: dict[ScenarioType, list[str]] = {
    ScenarioType.DETERMINATION_NOT_YET_SCHEDULED: _DETERMINATION_NEXT_STEPS,
    ScenarioType.DETERMINATION_SCHEDULED: [
        "claim-status:your-next-steps.determination.attend-interview",
        *_DETERMINATION_NEXT_STEPS,
    ],
    ScenarioType.DETERMINATION_AWAITING_DECISION: [
        "claim-status:your-next-steps.determination.wait-for-decision",
    ],
    ScenarioType.PENDING_WEEKS: ["claim-status:your-next-steps.pending-weeks.wait"],
    ScenarioType.BASE_NO_WEEKS_TO_CERTIFY: ["claim-status:your-next-steps.base.reopen-claim"],
    ScenarioType.BASE_WEEKS_TO_CERTIFY: ["claim-status:your-next-steps.base.certify"],
}

EDD_NEXT_STEPS: dict[ScenarioType, list[str]] = {
    ScenarioType.DETERMINATION_NOT_YET_SCHEDULED: [
        "claim-status:edd-next-steps.determination.schedule-interview",
        *_DETERMINATION_EDD_NEXT_STEPS,
    ],
    ScenarioType.DETERMINATION_SCHEDULED: [
        "claim-status:edd-next-steps.determination.call-at-appointment",
        *_DETERMINATION_EDD_NEXT_STEPS,
    ],
    ScenarioType.DETERMINATION_AWAITING_DECISION: _DETERMINATION_EDD_NEXT_STEPS,
    ScenarioType.PENDING_WEEKS: ["claim-status:edd-next-steps.pending-weeks.review"],
    ScenarioType.BASE_NO_WEEKS_TO_CERTIFY: [],
    ScenarioType.BASE_WEEKS_TO_CERTIFY: [],
}


class MissingClaimDetailsError(ValueError):
    pass


@dataclass(slots=True)
class AppointmentContent:
    date: str
    time_slot: TimeSlot | None = None
    time_slot_label: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date,
            "time_slot": self.time_slot.to_dict() if self.time_slot else None,
            "time_slot_label": self.time_slot_label,
        }


@dataclass(slots=True)
class StatusContent:
    scenario: ScenarioType
    heading: str
    summary: list[str]
    continue_certifying: bool
    your_next_steps: list[str] = field(default_factory=list)
    edd_next_steps: list[str] = field(default_factory=list)
    appointment: AppointmentContent | None = None

    @property
    def scenario_name(self) -> str:
        return self.scenario.description

    def to_dict(self) -> dict[str, Any]:
        return {
            "scenario": self.scenario.value,
            "scenario_name": self.scenario_name,
            "heading": self.heading,
            "summary": list(self.summary),
            "continue_certifying": self.continue_certifying,
            "your_next_steps": list(self.your_next_steps),
            "edd_next_steps": list(self.edd_next_steps),
            "appointment": self.appointment.to_dict() if self.appointment else None,
        }


@dataclass(slots=True)
class DetailsContent:
    program_type: str
    benefit_year: str
    claim_balance: str
    weekly_benefit_amount: str
    last_payment_issued: str
    last_payment_amount: str
    monetary_status: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class ScenarioContent:
    status: StatusContent
    details: DetailsContent

    @property
    def scenario_name(self) -> str:
        return self.status.scenario_name

    def to_dict(self) -> dict[str, Any]:
        return {
            "scenario_name": self.scenario_name,
            "status": self.status.to_dict(),
            "details": self.details.to_dict(),
        }


def format_currency(amount: float | None) -> str:
    if amount is None:
        return ""
    return f"${amount:,.2f}"


def _format_valid_date(value: str | None) -> str:
    return format_date(value) if is_valid_date(value) else ""


def build_appointment(determination: PendingDetermination) -> AppointmentContent:
    slot = parse_time_slot(determination.time_slot_description)
    return AppointmentContent(
        date=format_date(determination.schedule_date),
        time_slot=slot,
        time_slot_label=describe_time_slot(slot) if slot else None,
    )


def build_status_content(result: ScenarioResult) -> StatusContent:
    scenario = result.scenario
    key = scenario.content_key
    next_steps = list(YOUR_NEXT_STEPS[scenario])
    if result.continue_certifying:
        next_steps.append(CONTINUE_CERTIFYING_KEY)

    appointment = None
    if scenario is ScenarioType.DETERMINATION_SCHEDULED and result.determination is not None:
        appointment = build_appointment(result.determination)

    return StatusContent(
        scenario=scenario,
        heading=f"claim-status:scenarios.{key}.heading",
        summary=[f"claim-status:scenarios.{key}.summary"],
        continue_certifying=result.continue_certifying,
        your_next_steps=next_steps,
        edd_next_steps=list(EDD_NEXT_STEPS[scenario]),
        appointment=appointment,
    )


def build_details_content(details: ClaimDetails) -> DetailsContent:
    start = _format_valid_date(details.benefit_year_start_date)
    end = _format_valid_date(details.benefit_year_end_date)
    benefit_year = f"{start} - {end}" if start and end else ""
    return DetailsContent(
        program_type=details.program_type or "",
        benefit_year=benefit_year,
        claim_balance=format_currency(details.claim_balance),
        weekly_benefit_amount=format_currency(details.weekly_benefit_amount),
        last_payment_issued=_format_valid_date(details.last_payment_issued),
        last_payment_amount=format_currency(details.last_payment_amount),
        monetary_status=details.monetary_status or "",
    )


def get_scenario_content(claim: ClaimRecord, resolver: ScenarioResolver | None = None) -> ScenarioContent:
    result = (resolver or ScenarioResolver()).resolve(claim)
    status = build_status_content(result)

    if claim.claim_details is None:
        raise MissingClaimDetailsError("Missing claim details")
    details = build_details_content(claim.claim_details)

    return ScenarioContent(status=status, details=details)
