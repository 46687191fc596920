from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


def _text(payload: dict[str, Any], *keys: str) -> str | None:
    for key in keys:
        value = payload.get(key)
        if isinstance(value, str):
            return value
    return None


def _flag(payload: dict[str, Any], *keys: str) -> bool | None:
    for key in keys:
        value = payload.get(key)
        if isinstance(value, bool):
            return value
    return None


def _number(payload: dict[str, Any], key: str) -> float | None:
    value = payload.get(key)
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.replace(",", "").replace("$", ""))
        except ValueError:
            return None
    return None


@dataclass(slots=True, frozen=True)
class PendingDetermination:
    determination_status: str | None = None
    schedule_date: str | None = None
    request_date: str | None = None
    time_slot_description: str | None = None

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> PendingDetermination:
        return cls(
            determination_status=_text(payload, "determinationStatus"),
            schedule_date=_text(payload, "scheduleDate"),
            request_date=_text(payload, "requestDate"),
            time_slot_description=_text(payload, "timeSlotDescription", "timeSlotDesc"),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(slots=True, frozen=True)
class ClaimDetails:
    program_type: str | None = None
    benefit_year_start_date: str | None = None
    benefit_year_end_date: str | None = None
    claim_balance: float | None = None
    weekly_benefit_amount: float | None = None
    last_payment_issued: str | None = None
    last_payment_amount: float | None = None
    monetary_status: str | None = None

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> ClaimDetails:
        return cls(
            program_type=_text(payload, "programType"),
            benefit_year_start_date=_text(payload, "benefitYearStartDate"),
            benefit_year_end_date=_text(payload, "benefitYearEndDate"),
            claim_balance=_number(payload, "claimBalance"),
            weekly_benefit_amount=_number(payload, "weeklyBenefitAmount"),
            last_payment_issued=_text(payload, "lastPaymentIssued"),
            last_payment_amount=_number(payload, "lastPaymentAmount"),
            monetary_status=_text(payload, "monetaryStatus"),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(slots=True, frozen=True)
class ClaimRecord:
    unique_number: str | None = None
    has_pending_weeks: bool | None = None
    has_certification_weeks_available: bool | None = None
    is_bye: bool | None = None
    pending_determinations: tuple[PendingDetermination, ...] = field(default_factory=tuple)
    claim_details: ClaimDetails | None = None

    @classmethod
    def from_api_payload(cls, payload: dict[str, Any]) -> ClaimRecord:
        raw_determinations = payload.get("pendingDetermination")
        if not isinstance(raw_determinations, list):
            raw_determinations = []
        determinations = tuple(
            PendingDetermination.from_dict(item)
            for item in raw_determinations
            if isinstance(item, dict)
        )

        raw_details = payload.get("claimDetails")
        details = ClaimDetails.from_dict(raw_details) if isinstance(raw_details, dict) else None

        unique_number = payload.get("uniqueNumber")
        if unique_number is not None:
            unique_number = str(unique_number)

        return cls(
            unique_number=unique_number,
            has_pending_weeks=_flag(payload, "hasPendingWeeks", "hasValidPendingWeeks"),
            has_certification_weeks_available=_flag(payload, "hasCertificationWeeksAvailable"),
            is_bye=_flag(payload, "isBYE"),
            pending_determinations=determinations,
            claim_details=details,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "unique_number": self.unique_number,
            "has_pending_weeks": self.has_pending_weeks,
            "has_certification_weeks_available": self.has_certification_weeks_available,
            "is_bye": self.is_bye,
            "pending_determinations": [d.to_dict() for d in self.pending_determinations],
            "claim_details": self.claim_details.to_dict() if self.claim_details else None,
        }
