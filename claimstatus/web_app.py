from __future__ import annotations

import uuid
from datetime import date
from html import escape
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse
from loguru import logger
from pydantic import BaseModel

from .api_gateway import ApiGatewayClient, get_unique_number
from .config import Settings, load_settings
from .content import ScenarioContent, get_scenario_content
from .preflight import run_preflight
from .schemas import ClaimRecord
from .scenarios.determinations import DeterminationClassifier
from .scenarios.resolver import ScenarioResolver
from .utils.logger import setup_logging

HEALTH_PROBE_USER_AGENT = "Edge Health Probe"


class ScenarioIn(BaseModel):
    claim: dict[str, Any]
    today: date | None = None


class ClaimStatusUnavailable(Exception):
    pass


def build_resolver(settings: Settings, today: date | None = None) -> ScenarioResolver:
    classifier = DeterminationClassifier(
        non_pending_values=settings.non_pending_determination_values,
        min_valid_date=settings.min_valid_date,
        today=today,
    )
    return ScenarioResolver(classifier=classifier)


def _load_scenario_content(
    request: Request,
    settings: Settings,
    gateway: ApiGatewayClient,
) -> ScenarioContent:
    logger.info(
        "Request: {} {} query={}",
        request.method,
        request.url.path,
        dict(request.query_params),
    )
    unique_number = get_unique_number(request.headers, settings.id_header_name)
    if not unique_number:
        if request.headers.get("user-agent") != HEALTH_PROBE_USER_AGENT:
            logger.error("Missing unique number")
        raise ClaimStatusUnavailable("missing_unique_number")

    try:
        claim = gateway.fetch_claim(unique_number)
        logger.bind(claim=claim.to_dict()).info("ClaimData")
        content = get_scenario_content(claim, resolver=build_resolver(settings))
        logger.bind(scenario_content=content.to_dict()).info("ScenarioContent")
    except Exception as exc:
        logger.opt(exception=exc).error("Application error")
        raise ClaimStatusUnavailable(str(exc)) from exc
    return content


def _link(url: str, label: str) -> str:
    if not url:
        return escape(label)
    return f'<a href="{escape(url)}">{escape(label)}</a>'


def _render_list(items: list[str]) -> str:
    return "".join(f"<li>{escape(item)}</li>" for item in items)


def render_page(
    settings: Settings,
    body: str,
    user_arrived_from_uio_mobile: bool = False,
) -> str:
    home_url = (
        settings.url_prefix_uio_mobile if user_arrived_from_uio_mobile else settings.url_prefix_uio_desktop
    )
    return (
        "<!DOCTYPE html>"
        '<html lang="en"><head><meta charset="utf-8"><title>Claim Status</title>'
        f'<link rel="icon" href="{escape(settings.asset_prefix)}/favicon.ico"></head>'
        '<body><div class="index">'
        f'<header>{_link(home_url, "UI Online")}</header>'
        f'<main class="main"><div class="main-content">{body}</div></main>'
        "</div></body></html>"
    )


def render_claim_section(content: ScenarioContent) -> str:
    status = content.status
    details = content.details
    appointment = ""
    if status.appointment is not None:
        label = status.appointment.time_slot_label or ""
        appointment = (
            f'<p class="appointment">{escape(status.appointment.date)} {escape(label)}</p>'
        )
    return (
        "<h1>Claim Status</h1>"
        f'<section class="claim-status" data-scenario="{status.scenario.value}">'
        f"<h2>{escape(status.heading)}</h2>"
        f"<ul class=\"summary\">{_render_list(status.summary)}</ul>"
        f"{appointment}"
        f"<ul class=\"your-next-steps\">{_render_list(status.your_next_steps)}</ul>"
        f"<ul class=\"edd-next-steps\">{_render_list(status.edd_next_steps)}</ul>"
        "</section>"
        '<section class="claim-details"><dl>'
        f"<dt>Program type</dt><dd>{escape(details.program_type)}</dd>"
        f"<dt>Benefit year</dt><dd>{escape(details.benefit_year)}</dd>"
        f"<dt>Claim balance</dt><dd>{escape(details.claim_balance)}</dd>"
        f"<dt>Weekly benefit amount</dt><dd>{escape(details.weekly_benefit_amount)}</dd>"
        f"<dt>Last payment issued</dt><dd>{escape(details.last_payment_issued)}</dd>"
        f"<dt>Last payment amount</dt><dd>{escape(details.last_payment_amount)}</dd>"
        f"<dt>Monetary status</dt><dd>{escape(details.monetary_status)}</dd>"
        "</dl></section>"
    )


def create_web_app(
    settings: Settings | None = None,
    gateway: ApiGatewayClient | None = None,
) -> FastAPI:
    project_root = Path(__file__).resolve().parents[1]
    if settings is None:
        load_dotenv(project_root / ".env", override=False)
        settings = load_settings()
        setup_logging(level=settings.log_level, log_dir=settings.log_dir)

    app = FastAPI(title="Claim Status Tracker")
    app.state.settings = settings
    app.state.gateway = gateway or ApiGatewayClient(settings)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/api/doctor")
    async def api_doctor(strict: bool = False) -> JSONResponse:
        report = run_preflight(settings=settings)
        if strict and report.get("summary", {}).get("warnings", 0) > 0 and report["status"] != "fail":
            report["status"] = "fail"
            report["strict_override"] = "warnings_promoted_to_failures"
        return JSONResponse(report)

    @app.get("/", response_class=HTMLResponse)
    def index(request: Request) -> HTMLResponse:
        from_mobile = request.query_params.get("from") == "uiom"
        if settings.enable_maintenance_page:
            body = "<h1>Claim Status</h1><p>This service is down for scheduled maintenance.</p>"
            return HTMLResponse(render_page(settings, body, from_mobile))

        with logger.contextualize(request_id=str(uuid.uuid4())):
            try:
                content = _load_scenario_content(request, settings, app.state.gateway)
            except ClaimStatusUnavailable:
                body = "<h1>Claim Status</h1><p>Your claim status is not available right now.</p>"
                return HTMLResponse(render_page(settings, body, from_mobile), status_code=500)
        return HTMLResponse(render_page(settings, render_claim_section(content), from_mobile))

    @app.get("/api/claim-status")
    def api_claim_status(request: Request) -> JSONResponse:
        with logger.contextualize(request_id=str(uuid.uuid4())):
            try:
                content = _load_scenario_content(request, settings, app.state.gateway)
            except ClaimStatusUnavailable as exc:
                return JSONResponse({"error": str(exc)}, status_code=500)
        return JSONResponse({"scenario_content": content.to_dict()})

    @app.post("/api/scenario")
    async def api_scenario(body: ScenarioIn) -> JSONResponse:
        claim = ClaimRecord.from_api_payload(body.claim)
        result = build_resolver(settings, today=body.today).resolve(claim)
        return JSONResponse(result.to_dict())

    return app
