# -*- coding: utf-8 -*-
"""
Tests for the update envelope builder.
"""

import copy
import json
import math
from collections import OrderedDict
from dataclasses import FrozenInstanceError
from types import MappingProxyType

import pytest

from promapp.envelope import (
    EnvelopeErrorCode,
    InvalidArgument,
    UpdateEnvelope,
    build_update_envelope,
)


SAMPLE_PROCESSES = [
    {"Name": "A"},
    {"Name": "Proc1", "Id": 7},
    {"Name": "Nested", "ProcessProcedures": {"Activity": [{"Number": "1.0", "Text": "Start"}]}, "Inputs": []},
    {"Flag": True, "Missing": None, "Ratio": 0.5},
    {},
]


class TestBuildUpdateEnvelope:
    """build_update_envelope() happy path"""

    def test_concrete_scenario(self):
        envelope = build_update_envelope({"Name": "Proc1", "Id": 7}, "fix typo")

        assert envelope.to_dict() == {
            "ProcessJson": '{"Name":"Proc1","Id":7}',
            "ChangeDescription": "fix typo",
            "DoSubmitForApproval": False,
            "DoPublish": False,
            "SuppressChangeNotification": False,
            "SharedActivityCollectionEditModel": {
                "ActivitiesToDelete": [],
                "ActivitiesToShare": [],
                "ActivitiesToUnlink": [],
            },
            "VariantConnectionChangeStates": [],
        }

    def test_key_order_of_envelope(self):
        keys = list(build_update_envelope({"Name": "A"}).to_dict())

        assert keys == [
            "ProcessJson",
            "ChangeDescription",
            "DoSubmitForApproval",
            "DoPublish",
            "SuppressChangeNotification",
            "SharedActivityCollectionEditModel",
            "VariantConnectionChangeStates",
        ]

    @pytest.mark.parametrize("process", SAMPLE_PROCESSES)
    def test_process_json_round_trips(self, process):
        envelope = build_update_envelope(process, "desc")

        assert isinstance(envelope.process_json, str)
        assert json.loads(envelope.process_json) == process

    @pytest.mark.parametrize("description", ["", "fix typo", "多語言說明", "line1\nline2"])
    def test_change_description_passes_through(self, description):
        assert build_update_envelope({"Name": "A"}, description).change_description == description

    def test_change_description_defaults_to_empty(self):
        assert build_update_envelope({"Name": "A"}).change_description == ""

    @pytest.mark.parametrize("process", SAMPLE_PROCESSES)
    def test_constant_fields(self, process):
        envelope = build_update_envelope(process, "")

        assert envelope.do_submit_for_approval is False
        assert envelope.do_publish is False
        assert envelope.suppress_change_notification is False
        body = envelope.to_dict()
        assert body["SharedActivityCollectionEditModel"] == {
            "ActivitiesToDelete": [],
            "ActivitiesToShare": [],
            "ActivitiesToUnlink": [],
        }
        assert body["VariantConnectionChangeStates"] == []

    def test_insertion_order_is_preserved(self):
        process = {"Zeta": 1, "Alpha": 2, "Mid": 3}

        assert build_update_envelope(process).process_json == '{"Zeta":1,"Alpha":2,"Mid":3}'

    def test_non_ascii_is_not_escaped(self):
        envelope = build_update_envelope({"Name": "Café 流程"})

        assert envelope.process_json == '{"Name":"Café 流程"}'

    def test_input_is_not_mutated(self):
        process = {"Name": "Proc1", "ProcessProcedures": {"Activity": [{"Number": "1.0"}]}}
        snapshot = copy.deepcopy(process)

        build_update_envelope(process, "desc")

        assert process == snapshot

    def test_other_mappings_are_accepted(self):
        ordered = OrderedDict([("Name", "A"), ("Id", 1)])
        proxy = MappingProxyType({"Name": "B"})

        assert build_update_envelope(ordered).process_json == '{"Name":"A","Id":1}'
        assert build_update_envelope(proxy).process_json == '{"Name":"B"}'

    def test_deterministic(self):
        process = {"Name": "Proc1", "Id": 7, "Tags": ["a", "b"]}

        assert build_update_envelope(process, "x") == build_update_envelope(process, "x")


class TestInvalidArguments:
    """Validation failures raise InvalidArgument"""

    @pytest.mark.parametrize("bad", [None, 42, 3.5, "text", True, [], ["Name"], ("Name",)])
    def test_non_mapping_process_json(self, bad):
        with pytest.raises(InvalidArgument) as exc_info:
            build_update_envelope(bad, "x")

        assert exc_info.value.code == EnvelopeErrorCode.INVALID_PROCESS_JSON
        assert "processJson must be a valid object" in str(exc_info.value)

    @pytest.mark.parametrize("bad", [123, None, b"bytes", ["desc"]])
    def test_non_string_change_description(self, bad):
        with pytest.raises(InvalidArgument) as exc_info:
            build_update_envelope({}, bad)

        assert exc_info.value.code == EnvelopeErrorCode.INVALID_CHANGE_DESCRIPTION

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            build_update_envelope(None)

    @pytest.mark.parametrize("bad_value", [{1, 2}, object(), math.nan, math.inf])
    def test_unserializable_values(self, bad_value):
        with pytest.raises(InvalidArgument) as exc_info:
            build_update_envelope({"Name": "A", "Bad": bad_value})

        assert exc_info.value.code == EnvelopeErrorCode.UNSERIALIZABLE_PROCESS_JSON
        assert exc_info.value.__cause__ is not None

    @pytest.mark.parametrize("process", [
        {1: "a"},
        {1: "a", "1": "b"},
        {None: "x"},
        {True: "x"},
        {"x": {None: 1}},
        {"ProcessProcedures": {"Activity": [{"Number": "1.0"}, {2.5: "Task"}]}},
    ])
    def test_non_string_keys(self, process):
        with pytest.raises(InvalidArgument) as exc_info:
            build_update_envelope(process, "x")

        assert exc_info.value.code == EnvelopeErrorCode.UNSERIALIZABLE_PROCESS_JSON
        assert "non-string key" in str(exc_info.value)


class TestUpdateEnvelopeType:
    """UpdateEnvelope immutability"""

    def test_constant_fields_cannot_be_passed(self):
        with pytest.raises(TypeError):
            UpdateEnvelope(process_json="{}", do_publish=True)

    def test_envelope_is_frozen(self):
        envelope = build_update_envelope({"Name": "A"})

        with pytest.raises(FrozenInstanceError):
            envelope.change_description = "changed"

    def test_to_dict_returns_fresh_lists(self):
        envelope = build_update_envelope({"Name": "A"})

        first = envelope.to_dict()
        first["VariantConnectionChangeStates"].append("x")
        first["SharedActivityCollectionEditModel"]["ActivitiesToDelete"].append("y")

        second = envelope.to_dict()
        assert second["VariantConnectionChangeStates"] == []
        assert second["SharedActivityCollectionEditModel"]["ActivitiesToDelete"] == []
