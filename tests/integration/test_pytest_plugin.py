"""Integration tests for the jsontext pytest plugin.

These tests verify that the json_text_field fixture is auto-discovered
via the pytest11 entry point and behaves correctly.

NOTE: These tests require jsontext to be installed (even in editable mode
via ``pip install -e .``). The pytest11 entry point is only registered at
install time -- running from a raw source checkout without installing will not
discover the fixture.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Any

from jsontext import FieldConfig, JSONTextField, NthFallback, ReturnMode


def test_fixture_returns_callable(json_text_field: Any) -> None:
    assert callable(json_text_field)


def test_fixture_builds_field_from_text(json_text_field: Any) -> None:
    field = json_text_field('{"foo": "bar"}')
    assert isinstance(field, JSONTextField)
    assert field.extract("->", "foo") == '{"foo":"bar"}'


def test_fixture_encodes_json_values(json_text_field: Any) -> None:
    field = json_text_field({"a": 1, "b": [2, 3]})
    assert field.value == '{"a":1,"b":[2,3]}'
    assert field.last() == '{"1":3}'


def test_fixture_return_mode(json_text_field: Any) -> None:
    field = json_text_field({"a": 1}, return_mode="array")
    assert field.return_mode is ReturnMode.STRUCTURED
    assert field.first() == {"a": 1}


def test_fixture_config(json_text_field: Any) -> None:
    field = json_text_field({"a": 1}, config=FieldConfig(nth_fallback=NthFallback.EMPTY))
    assert field.nth(5) == "{}"


def test_fixture_default_is_empty_document(json_text_field: Any) -> None:
    assert json_text_field().first() == "{}"


def test_plugin_discovery() -> None:
    """Verify json_text_field appears in pytest --fixtures output."""
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "--fixtures", "-q"],
        capture_output=True,
        text=True,
        cwd=str(Path(__file__).resolve().parents[2]),
    )
    assert "json_text_field" in result.stdout, (
        f"json_text_field not found in pytest --fixtures output.\n"
        f"stdout:\n{result.stdout}\n"
        f"stderr:\n{result.stderr}"
    )
