from __future__ import annotations

import argparse
import json
from datetime import datetime
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from .api_gateway import ApiGatewayClient, ApiGatewayError
from .config import load_settings
from .content import MissingClaimDetailsError, get_scenario_content
from .preflight import run_preflight
from .schemas import ClaimRecord
from .scenarios.determinations import DeterminationClassifier
from .scenarios.resolver import ScenarioResolver
from .utils.logger import setup_logging


def _json_print(payload: Any) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=True))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="claimstatus", description="Claim Status Tracker CLI")
    sub = parser.add_subparsers(dest="command", required=True)

    web = sub.add_parser("serve-web", help="Run the claim status web interface")
    web.add_argument("--host", default="127.0.0.1")
    web.add_argument("--port", type=int, default=8000)
    web.add_argument("--reload", action="store_true")

    classify = sub.add_parser("classify", help="Resolve the scenario for a claim JSON file")
    classify.add_argument("--claim-file", required=True)
    classify.add_argument("--today", default=None, help="YYYY-MM-DD")

    fetch = sub.add_parser("fetch-claim", help="Query the API gateway and build scenario content")
    fetch.add_argument("--unique-number", required=True)

    doctor = sub.add_parser("doctor", help="Run environment and runtime preflight checks")
    doctor.add_argument("--strict", action="store_true", help="Treat warnings as failures")

    return parser


def main(argv: list[str] | None = None) -> None:
    project_root = Path(__file__).resolve().parents[1]
    load_dotenv(project_root / ".env", override=False)

    settings = load_settings()
    setup_logging(level=settings.log_level, log_dir=settings.log_dir)
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "serve-web":
        import uvicorn

        uvicorn.run(
            "claimstatus.web_app:create_web_app",
            host=args.host,
            port=args.port,
            reload=bool(args.reload),
            factory=True,
        )
        return

    if args.command == "doctor":
        report = run_preflight(settings=settings)
        if args.strict and report.get("summary", {}).get("warnings", 0) > 0 and report["status"] != "fail":
            report["status"] = "fail"
            report["strict_override"] = "warnings_promoted_to_failures"
        _json_print(report)
        return

    if args.command == "classify":
        try:
            payload = json.loads(Path(args.claim_file).read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            _json_print({"error": "claim_file_unreadable", "detail": str(exc)})
            return
        if not isinstance(payload, dict):
            _json_print({"error": "claim_file_unreadable", "detail": "expected a JSON object"})
            return

        today = datetime.strptime(args.today, "%Y-%m-%d").date() if args.today else None
        classifier = DeterminationClassifier(
            non_pending_values=settings.non_pending_determination_values,
            min_valid_date=settings.min_valid_date,
            today=today,
        )
        result = ScenarioResolver(classifier=classifier).resolve(ClaimRecord.from_api_payload(payload))
        _json_print(result.to_dict())
        return

    if args.command == "fetch-claim":
        classifier = DeterminationClassifier(
            non_pending_values=settings.non_pending_determination_values,
            min_valid_date=settings.min_valid_date,
        )
        try:
            claim = ApiGatewayClient(settings).fetch_claim(args.unique_number)
            content = get_scenario_content(claim, resolver=ScenarioResolver(classifier=classifier))
        except (ApiGatewayError, MissingClaimDetailsError) as exc:
            _json_print(
                {
                    "error": "fetch_claim_failed",
                    "detail": str(exc),
                    "hint": "Run `python -m claimstatus.cli doctor` to check gateway settings.",
                }
            )
            return
        _json_print(content.to_dict())
        return

    parser.error("Unknown command")


if __name__ == "__main__":
    main()
