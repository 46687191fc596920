from __future__ import annotations

import socket
import tempfile
from pathlib import Path
from typing import Any
from urllib.parse import urlsplit

from dotenv import load_dotenv

from .api_gateway import pem_from_pfx
from .config import Settings, load_settings


def _check_dns(host: str) -> tuple[bool, str]:
    try:
        socket.gethostbyname(host)
        return True, "resolved"
    except OSError as exc:  # pragma: no cover
        return False, str(exc)


def run_preflight(
    project_root: str | Path | None = None,
    settings: Settings | None = None,
) -> dict[str, Any]:
    if settings is None:
        root = Path(project_root) if project_root else Path(__file__).resolve().parents[1]
        load_dotenv(root / ".env", override=False)
        settings = load_settings()

    checks: list[dict[str, Any]] = []

    def add(name: str, ok: bool, severity: str, detail: str) -> None:
        checks.append({"name": name, "ok": ok, "severity": severity, "detail": detail})

    missing = settings.missing_api_settings()
    for name in ("id_header_name", "api_url", "api_user_key", "pfx_path"):
        add(f"setting:{name}", name not in missing, "fail", "required for API gateway queries")

    if settings.pfx_path is not None:
        try:
            pem_from_pfx(settings.pfx_path, settings.pfx_passphrase)
            add("client_certificate", True, "fail", str(settings.pfx_path))
        except (OSError, ValueError) as exc:
            add("client_certificate", False, "fail", f"{settings.pfx_path}: {exc}")

    host = urlsplit(settings.api_url).hostname if settings.api_url else None
    if host:
        ok, detail = _check_dns(host)
        add(f"dns:{host}", ok, "warn", detail)

    if settings.log_dir is not None:
        try:
            settings.log_dir.mkdir(parents=True, exist_ok=True)
            with tempfile.TemporaryFile(dir=settings.log_dir):
                pass
            add("log_dir", True, "warn", str(settings.log_dir))
        except OSError as exc:
            add("log_dir", False, "warn", f"{settings.log_dir}: {exc}")

    failed = [c for c in checks if not c["ok"] and c["severity"] == "fail"]
    warnings = [c for c in checks if not c["ok"] and c["severity"] == "warn"]

    status = "ok"
    if failed:
        status = "fail"
    elif warnings:
        status = "warn"

    return {
        "status": status,
        "settings": {
            "api_url": settings.api_url,
            "id_header_name": settings.id_header_name,
            "asset_prefix": settings.asset_prefix,
            "maintenance_page": settings.enable_maintenance_page,
            "min_valid_date": settings.min_valid_date.date().isoformat(),
            "non_pending_determination_values": sorted(settings.non_pending_determination_values),
        },
        "summary": {
            "passed": len([c for c in checks if c["ok"]]),
            "failed": len(failed),
            "warnings": len(warnings),
        },
        "checks": checks,
    }
