# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for module name resolution."""

from __future__ import annotations

import pytest

from actionmap.errors import ConfigurationError
from actionmap.module_name import MODULE_NAME_KEY, resolve_module_name, sanitize_module_name


def test_sanitize_strips_punctuation() -> None:
    assert sanitize_module_name("my-module!!") == "mymodule"
    assert sanitize_module_name("login_v2") == "login_v2"
    assert sanitize_module_name("***") == ""


def test_resolve_returns_sanitized_value() -> None:
    assert resolve_module_name({MODULE_NAME_KEY: "my-module!!"}) == "mymodule"


@pytest.mark.parametrize("options", [None, {}, {"other": "x"}, {MODULE_NAME_KEY: ""}, {MODULE_NAME_KEY: "   "}])
def test_resolve_rejects_missing_or_blank(options: dict[str, str] | None) -> None:
    with pytest.raises(ConfigurationError, match="No module name"):
        resolve_module_name(options)


def test_resolve_rejects_value_that_sanitizes_to_empty() -> None:
    with pytest.raises(ConfigurationError, match="no characters"):
        resolve_module_name({MODULE_NAME_KEY: "***"})
