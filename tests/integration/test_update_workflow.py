# -*- coding: utf-8 -*-
"""
Workflow tests: token → verification token → GET → PUT, over a mocked session.
"""

import json
from unittest.mock import Mock

import pytest

from promapp.services.errors import PromappApiError
from promapp.workflow import run_update
from tests.test_utils import make_login_html, make_response

TENANT_URL = "https://demo.promapp.com/tenant"
PROCESS_ID = "d4d28c92-9e48-44aa-a146-ee51403be621"


@pytest.fixture
def session(example_get_response):
    session = Mock()
    session.post.side_effect = [
        make_response(200, {"access_token": "bearer-abc"}),
        make_response(200, text=make_login_html("verify-xyz")),
    ]
    session.get.return_value = make_response(200, example_get_response)
    session.put.return_value = make_response(200, {"success": True})
    return session


def test_run_update_chains_calls(session):
    result = run_update(
        PROCESS_ID,
        {"Name": "Updated Process Name", "StateId": 1},
        "Updated process name",
        username="user@example.com",
        password="secret",
        tenant_url=TENANT_URL,
        session=session,
    )

    assert result.process_id == PROCESS_ID
    assert result.process_name == "Updated Process Name"
    assert result.response == {"success": True}

    token_call, login_call = session.post.call_args_list
    assert token_call[0][0] == f"{TENANT_URL}/oauth2/token"
    assert login_call[0][0] == f"{TENANT_URL}/Login.aspx"

    put_kwargs = session.put.call_args[1]
    assert put_kwargs["headers"]["Authorization"] == "Bearer bearer-abc"
    assert put_kwargs["headers"]["__RequestVerificationToken"] == "verify-xyz"
    sent = json.loads(put_kwargs["json"]["ProcessJson"])
    assert sent["Name"] == "Updated Process Name"
    assert sent["StateId"] == 1
    assert sent["Owner"] == "Jordan Lee"
    assert put_kwargs["json"]["ChangeDescription"] == "Updated process name"


def test_run_update_stops_on_fetch_failure(session):
    session.get.return_value = make_response(401, text="Unauthorized", reason="Unauthorized")

    with pytest.raises(PromappApiError):
        run_update(
            PROCESS_ID,
            {"Name": "x"},
            username="user",
            password="secret",
            tenant_url=TENANT_URL,
            session=session,
        )

    session.put.assert_not_called()
