# -*- coding: utf-8 -*-
"""
Process update workflow

1. Get a bearer token
2. Get a RequestVerificationToken
3. Fetch the process
4. Apply changes to processJson
5. Encapsulate and send the update
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import requests

from promapp.config import HTTP_TIMEOUT, TENANT_URL, TOKEN_DURATION
from promapp.payload_io import apply_changes
from promapp.services.auth import get_bearer_token, get_request_verification_token
from promapp.services.process_client import ProcessClient

logger = logging.getLogger(__name__)


@dataclass
class UpdateResult:
    process_id: str
    process_name: Optional[str] = None
    response: Dict[str, Any] = field(default_factory=dict)


def run_update(
    process_id: str,
    changes: Dict[str, Any],
    change_description: str = "",
    *,
    username: str,
    password: str,
    tenant_url: str = TENANT_URL,
    duration: int = TOKEN_DURATION,
    timeout: int = HTTP_TIMEOUT,
    session: Optional[requests.Session] = None,
) -> UpdateResult:
    """
    Run the full authenticate → fetch → update sequence for one process.

    Any failure propagates; nothing is retried.
    """
    logger.info("Step 1: Getting bearer token")
    bearer_token = get_bearer_token(
        username, password, tenant_url=tenant_url, duration=duration, timeout=timeout, session=session
    )

    logger.info("Step 2: Getting RequestVerificationToken")
    verification_token = get_request_verification_token(
        username, password, tenant_url=tenant_url, timeout=timeout, session=session
    )

    client = ProcessClient(
        bearer_token,
        verification_token,
        tenant_url=tenant_url,
        timeout=timeout,
        session=session,
    )

    logger.info(f"Step 3: Fetching process {process_id}")
    process_json = client.get_process(process_id)
    logger.info(f"Process fetched: {process_json.get('Name')}")

    logger.info(f"Step 4: Applying {len(changes)} change(s)")
    updated = apply_changes(process_json, changes)

    logger.info("Step 5: Sending update")
    response = client.update_process(process_id, updated, change_description)

    return UpdateResult(process_id=process_id, process_name=updated.get("Name"), response=response)
