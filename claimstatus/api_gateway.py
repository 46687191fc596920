from __future__ import annotations

import copy
import json
import tempfile
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from pathlib import Path
from typing import Any
from urllib.parse import urlencode, urlsplit, urlunsplit

import requests
from cryptography.hazmat.primitives.serialization import (
    Encoding,
    NoEncryption,
    PrivateFormat,
    pkcs12,
)
from loguru import logger

from .config import Settings
from .schemas import ClaimRecord

REQUEST_HEADERS = {"Accept": "application/json"}

_NULLISH_CLAIM_DETAILS = {
    "programType": "",
    "benefitYearStartDate": None,
    "benefitYearEndDate": None,
    "claimBalance": None,
    "weeklyBenefitAmount": None,
    "lastPaymentIssued": None,
    "lastPaymentAmount": None,
    "monetaryStatus": "",
}

# Shapes the gateway returns for a known unique number with no claim behind it.
# Both pending-weeks spellings are still seen upstream.
NULLISH_RESPONSES: list[dict[str, Any]] = [
    {
        "claimDetails": _NULLISH_CLAIM_DETAILS,
        "uniqueNumber": None,
        "hasCertificationWeeksAvailable": False,
        "hasValidPendingWeeks": False,
        "isBYE": False,
        "pendingDetermination": [],
    },
    {
        "claimDetails": _NULLISH_CLAIM_DETAILS,
        "uniqueNumber": None,
        "hasCertificationWeeksAvailable": False,
        "hasPendingWeeks": False,
        "isBYE": False,
        "pendingDetermination": [],
    },
    {
        "claimDetails": _NULLISH_CLAIM_DETAILS,
        "uniqueNumber": None,
        "hasCertificationWeeksAvailable": False,
        "isBYE": False,
        "pendingDetermination": [],
    },
]


class ApiGatewayError(RuntimeError):
    pass


def build_api_url(url: str, query_params: Mapping[str, str]) -> str:
    parts = urlsplit(url)
    query = urlencode(list(query_params.items()))
    if parts.query:
        query = f"{parts.query}&{query}"
    return urlunsplit((parts.scheme, parts.netloc, parts.path or "/", query, parts.fragment))


def extract_json(body: str) -> Any:
    return json.loads(body)


def get_unique_number(headers: Mapping[str, str], header_name: str) -> str | None:
    if not header_name:
        return None
    wanted = header_name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value or None
    return None


def response_is_nullish(payload: dict[str, Any]) -> bool:
    # An omitted uniqueNumber is left to the template comparison below.
    if "uniqueNumber" in payload and payload["uniqueNumber"] is None:
        return True
    blanked = copy.deepcopy(payload)
    blanked["uniqueNumber"] = None
    return any(blanked == template for template in NULLISH_RESPONSES)


def pem_from_pfx(pfx_path: Path, passphrase: str | None) -> tuple[bytes, bytes]:
    password = passphrase.encode("utf-8") if passphrase else None
    key, cert, extra_certs = pkcs12.load_key_and_certificates(pfx_path.read_bytes(), password)
    if key is None or cert is None:
        raise ValueError(f"{pfx_path} does not contain a private key and certificate")
    cert_pem = cert.public_bytes(Encoding.PEM)
    for extra in extra_certs or []:
        cert_pem += extra.public_bytes(Encoding.PEM)
    key_pem = key.private_bytes(Encoding.PEM, PrivateFormat.PKCS8, NoEncryption())
    return cert_pem, key_pem


class ApiGatewayClient:
    def __init__(self, settings: Settings, session: requests.Session | None = None) -> None:
        self.settings = settings
        self.session = session or requests.Session()

    @contextmanager
    def _client_cert(self) -> Iterator[tuple[str, str] | None]:
        if self.settings.pfx_path is None:
            raise ApiGatewayError("No client certificate configured (CERTIFICATE_DIR, PFX_FILE)")
        try:
            cert_pem, key_pem = pem_from_pfx(self.settings.pfx_path, self.settings.pfx_passphrase)
        except (OSError, ValueError) as exc:
            logger.opt(exception=exc).error("Read certificate error")
            raise ApiGatewayError(f"Unable to read client certificate: {exc}") from exc

        # requests only takes PEM files for client certificates.
        with tempfile.TemporaryDirectory(prefix="claimstatus-cert-") as tmp:
            cert_file = Path(tmp) / "client.crt"
            key_file = Path(tmp) / "client.key"
            cert_file.write_bytes(cert_pem)
            key_file.write_bytes(key_pem)
            key_file.chmod(0o600)
            yield str(cert_file), str(key_file)

    def fetch_claim(self, unique_number: str) -> ClaimRecord:
        missing = self.settings.missing_api_settings()
        if missing:
            logger.error("Missing required environment variable(s): {}", missing)

        url = build_api_url(
            self.settings.api_url,
            {"user_key": self.settings.api_user_key, "uniqueNumber": unique_number},
        )

        with self._client_cert() as cert:
            try:
                response = self.session.get(
                    url,
                    headers=REQUEST_HEADERS,
                    cert=cert,
                    timeout=self.settings.api_timeout_seconds,
                )
            except requests.RequestException as exc:
                logger.opt(exception=exc).error("API gateway error")
                raise ApiGatewayError(f"API gateway request failed: {exc}") from exc

        if response.status_code != 200:
            logger.error("API gateway error: status {}", response.status_code)
            raise ApiGatewayError("API Gateway response is not 200")

        try:
            payload = extract_json(response.text)
        except ValueError as exc:
            logger.opt(exception=exc).error("API gateway error")
            raise ApiGatewayError(f"API gateway returned invalid JSON: {exc}") from exc

        if not payload:
            message = f"API responded with a null response (queried with {unique_number}, returned null)"
            logger.error("Unexpected API gateway response: {}", message)
            raise ApiGatewayError(message)
        if not isinstance(payload, dict):
            message = f"API responded with a non-object response (queried with {unique_number})"
            logger.error("Unexpected API gateway response: {}", message)
            raise ApiGatewayError(message)

        returned = payload.get("uniqueNumber")
        if returned and str(returned) != unique_number:
            message = f"Mismatched API response and Header unique number ({returned} and {unique_number})"
            logger.error("Unexpected API gateway response: {}", message)
            raise ApiGatewayError(message)
        if response_is_nullish(payload):
            message = (
                f"API responded with a null object (queried with {unique_number}, "
                f"returned unique number {returned or 'null'})"
            )
            logger.error("Unexpected API gateway response: {}", message)
            raise ApiGatewayError(message)

        return ClaimRecord.from_api_payload(payload)
