import json
from pathlib import Path

import pytest

from claimstatus.cli import main


def test_classify_command_prints_scenario(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    claim_file = tmp_path / "claim.json"
    claim_file.write_text(
        json.dumps(
            {
                "hasCertificationWeeksAvailable": True,
                "pendingDetermination": [
                    {"scheduleDate": "2020-05-06T00:00:00", "timeSlotDesc": "1-3"},
                    {"requestDate": "2020-04-01T00:00:00"},
                ],
            }
        ),
        encoding="utf-8",
    )
    main(["classify", "--claim-file", str(claim_file), "--today", "2020-05-05"])
    payload = json.loads(capsys.readouterr().out)
    assert payload["scenario"] == 2
    assert payload["determination"]["time_slot_description"] == "1-3"
    assert payload["continue_certifying"] is True


def test_classify_command_reports_unreadable_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["classify", "--claim-file", str(tmp_path / "missing.json")])
    payload = json.loads(capsys.readouterr().out)
    assert payload["error"] == "claim_file_unreadable"
