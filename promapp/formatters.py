# -*- coding: utf-8 -*-
"""
Console message formatters.
"""

import json
from typing import Any, Dict

from promapp.envelope import UpdateEnvelope

# (label, key) pairs shown in the process summary, in display order
_SUMMARY_FIELDS = [
    ("Process Name", "Name"),
    ("Process ID", "Id"),
    ("UniqueId", "UniqueId"),
    ("State", "State"),
    ("StateId", "StateId"),
    ("Version", "Version"),
    ("Objective", "Objective"),
    ("Owner", "Owner"),
    ("Expert", "Expert"),
    ("Group", "Group"),
]


def preview(text: str, limit: int = 200) -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


def count_activities(process_json: Dict[str, Any]) -> int:
    procedures = process_json.get("ProcessProcedures") or {}
    if not isinstance(procedures, dict):
        return 0
    activities = procedures.get("Activity") or []
    return len(activities) if isinstance(activities, list) else 0


def format_process_summary(process_json: Dict[str, Any]) -> str:
    """
    Format the headline fields of a process.

    Fields missing from the process are skipped; strings are quoted.
    """
    lines = []
    for label, key in _SUMMARY_FIELDS:
        if key not in process_json:
            continue
        value = process_json[key]
        shown = f'"{value}"' if isinstance(value, str) else value
        lines.append(f"   ✓ {label}: {shown}")

    if "ProcessProcedures" in process_json:
        lines.append(f"   ✓ Activities: {count_activities(process_json)}")

    return "\n".join(lines)


def format_envelope_overview(envelope: UpdateEnvelope) -> str:
    """The PUT body with ProcessJson collapsed to its length"""
    overview = envelope.to_dict()
    overview["ProcessJson"] = f"<stringified JSON - {len(envelope.process_json)} chars>"
    return json.dumps(overview, ensure_ascii=False, indent=2)


def format_curl_command(process_url: str, payload_file: str) -> str:
    return f"""  curl --location --request PUT '{process_url}' \\
    --header 'Authorization: Bearer <your-bearer-token>' \\
    --header '__RequestVerificationToken: <your-verification-token>' \\
    --header 'Content-Type: application/json' \\
    --header 'x-requested-with: XMLHttpRequest' \\
    --data '@{payload_file}'"""


def format_python_usage(process_url: str) -> str:
    return f"""  response = requests.put(
      '{process_url}',
      headers={{
          'Authorization': f'Bearer {{bearer_token}}',
          '__RequestVerificationToken': verification_token,
          'Content-Type': 'application/json',
          'x-requested-with': 'XMLHttpRequest',
      }},
      json=envelope.to_dict(),
  )"""


def banner(title: str, width: int = 80) -> str:
    rule = "=" * width
    return f"{rule}\n{title}\n{rule}"
