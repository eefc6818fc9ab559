from __future__ import annotations

import json
from pathlib import Path

import pytest

RESOURCES_DIR = Path(__file__).resolve().parent.parent / "resources"
EXAMPLE_GET_RESPONSE = RESOURCES_DIR / "example_get_process_response.json"


def _top_level_tests_group(path: Path) -> str | None:
    parts = path.parts
    try:
        tests_index = parts.index("tests")
    except ValueError:
        return None
    if tests_index + 1 >= len(parts):
        return None
    return parts[tests_index + 1]


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    for item in items:
        group = _top_level_tests_group(Path(str(item.fspath)))
        if group == "unit":
            item.add_marker(pytest.mark.unit)
        elif group == "integration":
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def example_get_response_path() -> Path:
    return EXAMPLE_GET_RESPONSE


@pytest.fixture
def example_get_response() -> dict:
    return json.loads(EXAMPLE_GET_RESPONSE.read_text(encoding="utf-8"))
