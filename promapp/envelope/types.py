# -*- coding: utf-8 -*-
"""
Update Envelope Types

The fixed-shape request body accepted by PUT /Api/v1/Processes/{id}.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class SharedActivityCollectionEditModel:
    """Shared activity edits sent alongside a process update (always empty)"""

    activities_to_delete: Tuple[str, ...] = field(default=(), init=False)
    activities_to_share: Tuple[str, ...] = field(default=(), init=False)
    activities_to_unlink: Tuple[str, ...] = field(default=(), init=False)

    def to_dict(self) -> Dict[str, list]:
        return {
            "ActivitiesToDelete": list(self.activities_to_delete),
            "ActivitiesToShare": list(self.activities_to_share),
            "ActivitiesToUnlink": list(self.activities_to_unlink),
        }


@dataclass(frozen=True)
class UpdateEnvelope:
    """
    Request body for a process update.

    Only ProcessJson and ChangeDescription come from the caller. The flags and
    edit-model collections are constants and cannot be passed to __init__.
    """

    process_json: str                     # serialized processJson
    change_description: str = ""
    do_submit_for_approval: bool = field(default=False, init=False)
    do_publish: bool = field(default=False, init=False)
    suppress_change_notification: bool = field(default=False, init=False)
    shared_activity_collection_edit_model: SharedActivityCollectionEditModel = field(
        default_factory=SharedActivityCollectionEditModel, init=False
    )
    variant_connection_change_states: Tuple[Any, ...] = field(default=(), init=False)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the API's PascalCase JSON shape"""
        return {
            "ProcessJson": self.process_json,
            "ChangeDescription": self.change_description,
            "DoSubmitForApproval": self.do_submit_for_approval,
            "DoPublish": self.do_publish,
            "SuppressChangeNotification": self.suppress_change_notification,
            "SharedActivityCollectionEditModel": self.shared_activity_collection_edit_model.to_dict(),
            "VariantConnectionChangeStates": list(self.variant_connection_change_states),
        }
