# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for route module rendering and output sinks."""

from __future__ import annotations

from pathlib import Path

import pytest

from actionmap.api import RouterModule
from actionmap.errors import GenerationIOError
from actionmap.generator import artifact_filename, artifact_identifier, render_route_module
from actionmap.models import ModuleName, RouteTable, SourceArtifact
from actionmap.output import FileSystemSink, MemorySink


def _load(artifact: SourceArtifact) -> RouterModule:
    namespace: dict[str, object] = {}
    exec(compile(artifact.text, artifact.filename, "exec"), namespace)  # noqa: S102 - executing generated code under test
    router_cls = namespace[artifact.identifier]
    assert isinstance(router_cls, type)
    instance = router_cls()
    assert isinstance(instance, RouterModule)
    return instance


def test_identifier_and_filename_derive_from_module_name() -> None:
    assert artifact_identifier(ModuleName("login")) == "ActionMap__Module__login"
    assert artifact_filename(ModuleName("login")) == "actionmap__module__login.py"
    assert artifact_identifier(ModuleName("a")) != artifact_identifier(ModuleName("b"))


def test_rendered_module_resolves_paths() -> None:
    table = RouteTable(
        [
            ("login/LoginAction", "com.x.LoginAction"),
            ("login/LogoutAction", "com.x.LogoutAction"),
        ],
    )
    router = _load(render_route_module(table, ModuleName("login")))

    assert router.find_action_class_name("login/LoginAction") == "com.x.LoginAction"
    assert router.find_action_class_name("login/LogoutAction") == "com.x.LogoutAction"
    assert router.find_action_class_name("unknown/path") is None


def test_entries_are_emitted_in_path_order() -> None:
    artifact = render_route_module(RouteTable([("m/b", "x.B"), ("m/a", "x.A")]), ModuleName("m"))
    assert artifact.text.index("'m/a'") < artifact.text.index("'m/b'")


def test_rendering_is_byte_identical_for_equal_tables() -> None:
    first = render_route_module(RouteTable([("m/b", "x.B"), ("m/a", "x.A")]), ModuleName("m"))
    second = render_route_module(RouteTable([("m/a", "x.A"), ("m/b", "x.B")]), ModuleName("m"))
    assert first.text == second.text


def test_empty_table_renders_a_working_module() -> None:
    router = _load(render_route_module(RouteTable(), ModuleName("empty")))
    assert router.find_action_class_name("empty/x") is None


def test_paths_with_quotes_are_escaped() -> None:
    tricky = "m/it's \"quoted\"\\path"
    router = _load(render_route_module(RouteTable([(tricky, "x.Y")]), ModuleName("m")))
    assert router.find_action_class_name(tricky) == "x.Y"


def test_filesystem_sink_writes_artifact(tmp_path: Path) -> None:
    artifact = render_route_module(RouteTable([("m/a", "x.A")]), ModuleName("m"))
    target = FileSystemSink(tmp_path / "out" / "nested").write(artifact)

    assert target == tmp_path / "out" / "nested" / "actionmap__module__m.py"
    assert target.read_text(encoding="utf-8") == artifact.text


def test_filesystem_sink_wraps_os_errors(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    artifact = render_route_module(RouteTable(), ModuleName("m"))

    with pytest.raises(GenerationIOError) as excinfo:
        FileSystemSink(blocker).write(artifact)
    assert excinfo.value.path == blocker / artifact.filename


def test_memory_sink_keeps_artifacts_by_filename() -> None:
    sink = MemorySink()
    artifact = render_route_module(RouteTable(), ModuleName("m"))
    sink.write(artifact)
    assert sink.artifacts == {artifact.filename: artifact}
