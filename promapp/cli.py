# -*- coding: utf-8 -*-
"""Process Manager update CLI.

Commands:
- `encapsulate`: turn a saved GET response into a PUT body file, offline.
- `show`: print the headline fields of a saved GET response.
- `update`: authenticate, fetch, edit and update a process against the API.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

import requests

from promapp import config
from promapp.envelope import InvalidArgument, build_update_envelope
from promapp.formatters import (
    banner,
    format_curl_command,
    format_envelope_overview,
    format_process_summary,
    format_python_usage,
    preview,
)
from promapp.payload_io import (
    apply_changes,
    default_output_path,
    extract_process_json,
    load_get_response,
    parse_assignments,
    write_envelope,
)
from promapp.services.errors import PromappError
from promapp.workflow import run_update

logger = logging.getLogger(__name__)

_HANDLED_ERRORS = (InvalidArgument, PromappError, ValueError, OSError, requests.RequestException)


def _print_json(payload: dict[str, Any]) -> None:
    sys.stdout.write(json.dumps(payload, ensure_ascii=False, indent=2))
    sys.stdout.write("\n")


def _process_url(unique_id: Any) -> str:
    return f"{config.TENANT_URL}/Api/v1/Processes/{unique_id}"


def cmd_encapsulate(args: argparse.Namespace) -> int:
    get_response = load_get_response(args.input)
    process_json = extract_process_json(get_response)
    changes = parse_assignments(args.set or [])
    if changes:
        process_json = apply_changes(process_json, changes)

    envelope = build_update_envelope(process_json, args.description)
    output = write_envelope(envelope, args.output or default_output_path(args.input))

    if args.quiet:
        print(output)
        return 0

    print(banner("ENCAPSULATING PROCESS JSON"))
    print(f"\n1. Loaded {args.input}")
    print(format_process_summary(process_json))
    print(f"\n2. Encapsulated payload saved to: {output}")
    print(f"   ✓ ProcessJson stringified: {len(envelope.process_json)} characters")
    print(f'   ✓ ChangeDescription: "{envelope.change_description}"')
    print("\n3. Encapsulated Payload Structure:")
    print(format_envelope_overview(envelope))
    print("\n4. Preview of stringified ProcessJson (first 300 chars):")
    print("   " + preview(envelope.process_json, 300))

    url = _process_url(process_json.get("UniqueId", "<process-id>"))
    print("\nUsage:")
    print(format_curl_command(url, str(output)))
    print("\nOr in Python:")
    print(format_python_usage(url))
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    process_json = extract_process_json(load_get_response(args.input))
    print(format_process_summary(process_json))
    return 0


def cmd_update(args: argparse.Namespace) -> int:
    config.require_settings("PROMAPP_TENANT_ID", "PROMAPP_USERNAME", "PROMAPP_PASSWORD")
    process_id = args.process_id or config.PROCESS_ID
    if not process_id:
        raise ValueError("No process id given (use --process-id or PROMAPP_PROCESS_ID)")

    result = run_update(
        process_id,
        parse_assignments(args.set or []),
        args.description,
        username=config.USERNAME,
        password=config.PASSWORD,
        tenant_url=config.TENANT_URL,
    )
    _print_json(
        {
            "status": "updated",
            "process_id": result.process_id,
            "process_name": result.process_name,
            "result": result.response,
        }
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="promapp", description="Process Manager process update helper")
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help="Logging level (default: %(default)s)")
    sub = parser.add_subparsers(dest="command", required=True)

    enc = sub.add_parser("encapsulate", help="Build a PUT body file from a saved GET response")
    enc.add_argument("--input", required=True, help="Saved GET /Api/v1/Processes/{id} response")
    enc.add_argument("--output", help="Output file (default: <input>-encapsulated.json)")
    enc.add_argument("--description", default="", help="ChangeDescription to send")
    enc.add_argument("--set", action="append", metavar="KEY=VALUE", help="Overwrite a top-level processJson field")
    enc.add_argument("--quiet", action="store_true", help="Only print the output path")
    enc.set_defaults(func=cmd_encapsulate)

    show = sub.add_parser("show", help="Summarize a saved GET response")
    show.add_argument("--input", required=True)
    show.set_defaults(func=cmd_show)

    upd = sub.add_parser("update", help="Fetch, edit and update a process via the API")
    upd.add_argument("--process-id", help="Process UniqueId (default: PROMAPP_PROCESS_ID)")
    upd.add_argument("--description", default="", help="ChangeDescription to send")
    upd.add_argument("--set", action="append", metavar="KEY=VALUE", help="Overwrite a top-level processJson field")
    upd.set_defaults(func=cmd_update)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        return int(args.func(args))
    except _HANDLED_ERRORS as e:
        logger.debug("Command failed", exc_info=True)
        sys.stderr.write(f"Error: {e}\n")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
