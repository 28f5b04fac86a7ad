"""
GoDaddy registrar provider implementation.

This module talks to the GoDaddy domains API over HTTPS using requests.
Record updates replace the whole record set of a domain in one request.
"""

import logging
import os
from typing import Dict, List, Optional

import requests

from ..core.records import DomainRecord
from ..errors import RegistrarAPIError, RemoteWriteError
from .base_provider import Domain, RegistrarProvider

logger = logging.getLogger(__name__)

PRODUCTION_URL = "https://api.godaddy.com"
TEST_URL = "https://api.ote-godaddy.com"


class GoDaddyProvider(RegistrarProvider):
    """GoDaddy provider implementation using the v1 domains API."""

    DEFAULT_TIMEOUT = 30

    def __init__(self, config: Dict):
        """Initialize GoDaddy provider."""
        self.config = config
        self.key = config.get("key") or os.getenv("GODADDY_API_KEY", "")
        self.secret = config.get("secret") or os.getenv("GODADDY_API_SECRET", "")
        self.base_url = (config.get("base_url") or PRODUCTION_URL).rstrip("/")
        self.timeout = config.get("timeout", self.DEFAULT_TIMEOUT)

        if not self.key or not self.secret:
            raise ValueError("GoDaddy provider requires an API key and secret")

        self.session = requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"sso-key {self.key}:{self.secret}",
                "Content-Type": "application/json",
                "Accept": "application/json",
            }
        )

        logger.info(f"GoDaddy provider configured for {self.base_url}")

    def _headers(self, customer: str) -> Dict[str, str]:
        return {"X-Shopper-Id": customer} if customer else {}

    def _request(
        self,
        method: str,
        path: str,
        customer: str,
        body: Optional[List[Dict]] = None,
        error_class=RegistrarAPIError,
    ) -> requests.Response:
        url = f"{self.base_url}{path}"
        logger.debug(f"{method} {url}")

        try:
            response = self.session.request(
                method,
                url,
                json=body,
                headers=self._headers(customer),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise error_class(f"Request to {url} failed: {e}") from e

        if not response.ok:
            raise self._api_error(response, error_class)

        return response

    @staticmethod
    def _api_error(response: requests.Response, error_class):
        """Build an API error from a GoDaddy error body ({"code", "message"})."""
        code = "UNKNOWN"
        message = response.reason or "request failed"
        try:
            payload = response.json()
        except ValueError:
            payload = None

        if isinstance(payload, dict):
            code = payload.get("code", code)
            message = payload.get("message", message)

        logger.debug(f"GoDaddy API error {response.status_code}:{code}: {message}")
        return error_class(message, status_code=response.status_code, code=code)

    def get_domain(self, customer: str, domain: str) -> Domain:
        response = self._request("GET", f"/v1/domains/{domain}", customer)
        payload = response.json()
        return Domain(id=int(payload["domainId"]), name=payload.get("domain", domain))

    def get_domain_records(self, customer: str, domain: str) -> List[DomainRecord]:
        response = self._request("GET", f"/v1/domains/{domain}/records", customer)
        records = [DomainRecord.from_dict(entry) for entry in response.json()]
        logger.info(f"Retrieved {len(records)} records for {domain} from GoDaddy")
        return records

    def update_domain_records(
        self, customer: str, domain: str, records: List[DomainRecord]
    ) -> None:
        self._request(
            "PUT",
            f"/v1/domains/{domain}/records",
            customer,
            body=[record.to_dict() for record in records],
            error_class=RemoteWriteError,
        )
        logger.debug(f"Replaced {len(records)} records for {domain}")
