# -*- coding: utf-8 -*-
"""
Process Client Module

Reads and updates process definitions through /Api/v1/Processes/{id}.
"""

import logging
from typing import Any, Dict, Optional

import requests

from promapp.config import HTTP_TIMEOUT, TENANT_URL
from promapp.envelope import build_update_envelope
from promapp.services.errors import PromappApiError

logger = logging.getLogger(__name__)


class ProcessClient:
    def __init__(
        self,
        bearer_token: str,
        verification_token: Optional[str] = None,
        *,
        tenant_url: str = TENANT_URL,
        timeout: int = HTTP_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.bearer_token = bearer_token
        self.verification_token = verification_token
        self.tenant_url = tenant_url.rstrip("/")
        self.timeout = timeout
        self.http = session or requests

    def process_url(self, process_id: str) -> str:
        return f"{self.tenant_url}/Api/v1/Processes/{process_id}"

    def _write_headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.bearer_token}",
            "__RequestVerificationToken": self.verification_token,
            "Content-Type": "application/json",
            "x-requested-with": "XMLHttpRequest",
        }

    def get_process(self, process_id: str) -> Dict[str, Any]:
        """
        Fetch a process and return its processJson.

        Raises:
            PromappApiError: non-2xx response or no processJson object in the body
        """
        url = self.process_url(process_id)
        logger.info(f"Fetching process {process_id}")

        try:
            response = self.http.get(
                url,
                headers={"Authorization": f"Bearer {self.bearer_token}"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Process fetch failed for {process_id}: {e}")
            raise

        if not response.ok:
            logger.error(f"Process fetch failed with status {response.status_code}: {response.text}")
            raise PromappApiError.from_response("get process", response)

        process_json = response.json().get("processJson")
        if not isinstance(process_json, dict):
            raise PromappApiError(
                f"Process {process_id} response has no processJson object",
                status_code=response.status_code,
                body=response.text,
            )
        return process_json

    def update_process(
        self,
        process_id: str,
        process_json: Dict[str, Any],
        change_description: str = "",
    ) -> Dict[str, Any]:
        """
        Encapsulate `process_json` and PUT it back.

        Returns:
            Response JSON ({} when the body is empty)

        Raises:
            InvalidArgument: process_json / change_description rejected by the builder
            ValueError: no verification token on this client
            PromappApiError: non-2xx response
        """
        if not self.verification_token:
            raise ValueError("A RequestVerificationToken is required to update a process")

        envelope = build_update_envelope(process_json, change_description)
        url = self.process_url(process_id)
        logger.info(f"Updating process {process_id} ({len(envelope.process_json)} chars)")

        try:
            response = self.http.put(
                url,
                json=envelope.to_dict(),
                headers=self._write_headers(),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Process update failed for {process_id}: {e}")
            raise

        if not response.ok:
            logger.error(f"Process update failed with status {response.status_code}: {response.text}")
            raise PromappApiError.from_response("update process", response)

        logger.info(f"Process {process_id} updated successfully")
        if not response.text:
            return {}
        return response.json()
