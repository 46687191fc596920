from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from .scenarios.dates import MIN_VALID_DATE
from .scenarios.determinations import NON_PENDING_DETERMINATION_VALUES


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "y", "on", "enabled"}


def _env_csv(name: str, default: frozenset[str]) -> frozenset[str]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return frozenset(item.strip() for item in value.split(",") if item.strip())


def _env_date(name: str, default: datetime) -> datetime:
    value = os.getenv(name)
    if not value:
        return default
    return datetime.strptime(value.strip(), "%Y-%m-%d")


def _pfx_path() -> Path | None:
    cert_dir = os.getenv("CERTIFICATE_DIR", "")
    pfx_file = os.getenv("PFX_FILE", "")
    if cert_dir and pfx_file:
        return Path(cert_dir) / pfx_file
    return None


@dataclass(slots=True)
class Settings:
    id_header_name: str
    api_url: str
    api_user_key: str
    pfx_path: Path | None
    pfx_passphrase: str | None
    api_timeout_seconds: float

    asset_prefix: str
    url_prefix_uio_desktop: str
    url_prefix_uio_mobile: str
    url_prefix_bpo: str
    enable_google_analytics: bool
    enable_maintenance_page: bool

    log_level: str
    log_dir: Path | None

    min_valid_date: datetime
    non_pending_determination_values: frozenset[str]

    def missing_api_settings(self) -> list[str]:
        required = {
            "id_header_name": self.id_header_name,
            "api_url": self.api_url,
            "api_user_key": self.api_user_key,
            "pfx_path": self.pfx_path,
        }
        return [name for name, value in required.items() if not value]


def load_settings() -> Settings:
    asset_prefix = os.getenv("ASSET_PREFIX")
    if asset_prefix is None or asset_prefix == "undefined":
        asset_prefix = "/claimstatus"
    log_dir = os.getenv("LOG_DIR")

    return Settings(
        id_header_name=os.getenv("ID_HEADER_NAME", ""),
        api_url=os.getenv("API_URL", "").rstrip("/"),
        api_user_key=os.getenv("API_USER_KEY", ""),
        pfx_path=_pfx_path(),
        pfx_passphrase=os.getenv("PFX_PASSPHRASE") or None,
        api_timeout_seconds=float(os.getenv("API_TIMEOUT_SECONDS", "60")),
        asset_prefix=asset_prefix,
        url_prefix_uio_desktop=os.getenv("URL_PREFIX_UIO_DESKTOP", ""),
        url_prefix_uio_mobile=os.getenv("URL_PREFIX_UIO_MOBILE", ""),
        url_prefix_bpo=os.getenv("URL_PREFIX_BPO", ""),
        enable_google_analytics=_env_bool("ENABLE_GOOGLE_ANALYTICS", False),
        enable_maintenance_page=_env_bool("ENABLE_MAINTENANCE_PAGE", False),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        log_dir=Path(log_dir) if log_dir else None,
        min_valid_date=_env_date("MIN_VALID_DATE", MIN_VALID_DATE),
        non_pending_determination_values=_env_csv(
            "NON_PENDING_DETERMINATION_VALUES", NON_PENDING_DETERMINATION_VALUES
        ),
    )
