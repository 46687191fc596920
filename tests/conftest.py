from __future__ import annotations

import time
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest

from claimstatus.config import Settings
from claimstatus.scenarios.dates import MIN_VALID_DATE
from claimstatus.scenarios.determinations import NON_PENDING_DETERMINATION_VALUES


@pytest.fixture
def settings() -> Settings:
    return Settings(
        id_header_name="X-Unique-Number",
        api_url="https://gateway.example.com/claims",
        api_user_key="user-key",
        pfx_path=Path("/certs/client.pfx"),
        pfx_passphrase=None,
        api_timeout_seconds=60,
        asset_prefix="/claimstatus",
        url_prefix_uio_desktop="https://uio.example.com",
        url_prefix_uio_mobile="https://uiom.example.com",
        url_prefix_bpo="https://bpo.example.com",
        enable_google_analytics=False,
        enable_maintenance_page=False,
        log_level="INFO",
        log_dir=None,
        min_valid_date=MIN_VALID_DATE,
        non_pending_determination_values=NON_PENDING_DETERMINATION_VALUES,
    )


@pytest.fixture
def claim_payload() -> dict[str, Any]:
    return {
        "uniqueNumber": "12345",
        "claimDetails": {
            "programType": "UI",
            "benefitYearStartDate": "2020-09-27T00:00:00",
            "benefitYearEndDate": "2021-09-25T00:00:00",
            "claimBalance": 4567.5,
            "weeklyBenefitAmount": 450,
            "lastPaymentIssued": "2021-03-01T00:00:00",
            "lastPaymentAmount": 900,
            "monetaryStatus": "Active",
        },
        "hasCertificationWeeksAvailable": True,
        "hasValidPendingWeeks": False,
        "isBYE": False,
        "pendingDetermination": [],
    }


@pytest.fixture
def local_zone(monkeypatch: pytest.MonkeyPatch) -> Iterator[Callable[[str], None]]:
    """Switch the process time zone to a POSIX TZ rule for the test."""

    def switch(rule: str) -> None:
        monkeypatch.setenv("TZ", rule)
        time.tzset()

    yield switch
    monkeypatch.undo()
    time.tzset()
