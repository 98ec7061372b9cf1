"""pytest plugin for jsontext.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from jsontext import FieldConfig, JSONTextField, ReturnMode
from jsontext.codec import encode


@pytest.fixture
def json_text_field() -> Any:
    """Fixture that returns a JSONTextField factory.

    The fixture is function-scoped; every field it builds is independent, so
    changing the return mode in one test never leaks into another.

    Usage in tests::

        def test_lookup(json_text_field):
            field = json_text_field({"foo": "bar"}, return_mode="array")
            assert field.extract("->", "foo") == {"foo": "bar"}

    Returns:
        A callable ``_make(document="", config=None, return_mode=None)``.
        ``document`` may be JSON text or any JSON value, which is encoded
        first.
    """

    def _make(
        document: Any = "",
        config: FieldConfig | None = None,
        return_mode: ReturnMode | str | None = None,
    ) -> JSONTextField:
        text = document if isinstance(document, str) else encode(document)
        field = JSONTextField(text, config=config)
        if return_mode is not None:
            field.set_return_mode(return_mode)
        return field

    return _make
