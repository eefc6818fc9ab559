#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Encapsulation Demo Script

Shows how a GET /Api/v1/Processes/{id} response is turned into the PUT body.

Usage:
    python scripts/demo_encapsulation.py [--input FILE] [--output FILE]

    --input:  saved GET response (default: resources/example_get_process_response.json)
    --output: also write the full payload to this file
"""

import argparse
import json
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from promapp.envelope import build_update_envelope
from promapp.formatters import banner, format_envelope_overview, preview
from promapp.payload_io import apply_changes, extract_process_json, load_get_response, write_envelope


DEFAULT_INPUT = project_root / "resources" / "example_get_process_response.json"

# Edits applied during the demo
DEMO_CHANGES = {
    "Name": "Updated Process Name",
    "Objective": "Updated objective via API",
    "StateId": 1,  # Draft
}


def describe(value) -> str:
    if value is None:
        return "null"
    if isinstance(value, dict):
        return "[Object]"
    if isinstance(value, list):
        return "[Array]"
    return repr(value)


def run_demo(input_path: Path, output_path: Path = None) -> int:
    get_response = load_get_response(input_path)

    print(banner("PROCESS JSON ENCAPSULATION DEMO"))

    print("\n1. Original GET Response Structure:")
    for key, value in get_response.items():
        print(f"   - {key}: {describe(value)}")

    print("\n2. Extracting processJson for update:")
    process_json = extract_process_json(get_response)
    print(f"   Process Name: \"{process_json.get('Name')}\"")
    print(f"   Process ID: {process_json.get('Id')}")
    print(f"   Process UniqueId: {process_json.get('UniqueId')}")
    print(f"   Current State: {process_json.get('State')}")
    print(f"   Owner: {process_json.get('Owner')}")

    print("\n3. Making updates to the process:")
    updated = apply_changes(process_json, DEMO_CHANGES)
    for key, value in DEMO_CHANGES.items():
        print(f"   ✓ Updated {key}: {json.dumps(value, ensure_ascii=False)}")

    print("\n4. Encapsulating for PUT request:")
    envelope = build_update_envelope(updated, "Updated process name and objective via API demo")
    print(f"   ✓ ProcessJson: [Stringified - {len(envelope.process_json)} characters]")
    print(f'   ✓ ChangeDescription: "{envelope.change_description}"')
    print(f"   ✓ DoSubmitForApproval: {envelope.do_submit_for_approval}")
    print(f"   ✓ DoPublish: {envelope.do_publish}")
    print(f"   ✓ SuppressChangeNotification: {envelope.suppress_change_notification}")

    print("\n5. PUT Request Body Structure:")
    print(format_envelope_overview(envelope))

    print("\n6. Verification - ProcessJson is stringified:")
    print(f"   Type of processJson in GET response: {type(process_json).__name__}")
    print(f"   Type of ProcessJson in PUT payload: {type(envelope.process_json).__name__}")

    print("\n7. Sample of stringified ProcessJson (first 200 chars):")
    print("   " + preview(envelope.process_json, 200))

    print("\n" + banner("DEMO COMPLETE - Ready to send PUT request!"))

    if output_path:
        write_envelope(envelope, output_path)
        print(f"\n✓ Full payload written to: {output_path}")

    return 0


def main():
    parser = argparse.ArgumentParser(description="Process JSON encapsulation demo")
    parser.add_argument("--input", type=Path, default=DEFAULT_INPUT)
    parser.add_argument("--output", type=Path, default=None)
    args = parser.parse_args()
    return run_demo(args.input, args.output)


if __name__ == "__main__":
    sys.exit(main())
