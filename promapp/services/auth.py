# -*- coding: utf-8 -*-
"""
Process Manager Authentication Module

Obtains the two credentials a process update needs:
1. Bearer token (OAuth2 password grant on /oauth2/token)
2. __RequestVerificationToken (scraped from the Login.aspx response HTML)
"""

import logging
import re
from typing import Optional

import requests

from promapp.config import HTTP_TIMEOUT, TENANT_URL, TOKEN_DURATION
from promapp.services.errors import PromappApiError, TokenNotFoundError

logger = logging.getLogger(__name__)

VERIFICATION_TOKEN_PATTERN = re.compile(r'name="__RequestVerificationToken".*?value="([^"]+)"')


def get_bearer_token(
    username: str,
    password: str,
    *,
    tenant_url: str = TENANT_URL,
    duration: int = TOKEN_DURATION,
    timeout: int = HTTP_TIMEOUT,
    session: Optional[requests.Session] = None,
) -> str:
    """
    Request a bearer token with the password grant.

    Raises:
        PromappApiError: non-2xx response
        TokenNotFoundError: response JSON has no access_token
    """
    http = session or requests
    url = f"{tenant_url}/oauth2/token"

    logger.info(f"Requesting bearer token for {username}")
    try:
        response = http.post(
            url,
            data={
                "grant_type": "password",
                "username": username,
                "password": password,
                "duration": str(duration),
            },
            headers={"Content-Type": "application/x-www-form-urlencoded"},
            timeout=timeout,
        )
    except requests.RequestException as e:
        logger.error(f"Bearer token request failed: {e}")
        raise

    if not response.ok:
        logger.error(f"Bearer token request failed with status {response.status_code}")
        raise PromappApiError.from_response("get bearer token", response)

    access_token = response.json().get("access_token")
    if not access_token:
        raise TokenNotFoundError("Token response did not contain access_token")
    return access_token


def extract_request_verification_token(html: str) -> str:
    """
    Pull the __RequestVerificationToken value out of a login page.

    Examples:
        >>> extract_request_verification_token(
        ...     '<input name="__RequestVerificationToken" type="hidden" value="abc123" />')
        'abc123'
    """
    match = VERIFICATION_TOKEN_PATTERN.search(html or "")
    if not match:
        raise TokenNotFoundError("Could not find RequestVerificationToken in response")
    return match.group(1)


def get_request_verification_token(
    username: str,
    password: str,
    *,
    tenant_url: str = TENANT_URL,
    cookies: str = "",
    timeout: int = HTTP_TIMEOUT,
    session: Optional[requests.Session] = None,
) -> str:
    """Log in through Login.aspx and return the anti-forgery token from the page"""
    http = session or requests
    headers = {"Content-Type": "application/x-www-form-urlencoded"}
    if cookies:
        headers["Cookie"] = cookies

    logger.info("Requesting RequestVerificationToken from Login.aspx")
    try:
        response = http.post(
            f"{tenant_url}/Login.aspx",
            data={
                "ImpersonationEnabled": "False",
                "IsSingleSignOnEnabled": "False",
                "Login": "Login",
                "Password": password,
                "ResetPasswordEnabled": "True",
                "ReturnUrl": "",
                "UserName": username,
            },
            headers=headers,
            timeout=timeout,
        )
    except requests.RequestException as e:
        logger.error(f"Login.aspx request failed: {e}")
        raise

    if not response.ok:
        logger.error(f"Login.aspx request failed with status {response.status_code}")
        raise PromappApiError.from_response("get verification token", response)

    return extract_request_verification_token(response.text)
