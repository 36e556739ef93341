# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for route table validation and aggregation."""

from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor

from actionmap.builder import RouteTableAccumulator, build_route_table
from actionmap.models import ActionDeclaration, DiagnosticCode, ModuleName, RouteTable
from actionmap.severity import Severity

Declare = Callable[..., ActionDeclaration]
LOGIN = ModuleName("login")


def test_valid_declarations_map_to_their_types(declare: Declare) -> None:
    result = build_route_table(
        [
            declare("login/LoginAction", "com.x.LoginAction"),
            declare("login/LogoutAction", "com.x.LogoutAction"),
        ],
        LOGIN,
    )

    assert result.ok
    assert result.diagnostics == ()
    assert dict(result.table) == {
        "login/LoginAction": "com.x.LoginAction",
        "login/LogoutAction": "com.x.LogoutAction",
    }


def test_prefix_mismatch_is_reported_and_still_inserted(declare: Declare) -> None:
    stray = declare("shop/Cart", "com.x.Cart", line=7)
    result = build_route_table([declare("login/Ok", "com.x.Ok"), stray], LOGIN)

    assert [diag.code for diag in result.diagnostics] == [DiagnosticCode.PREFIX_MISMATCH]
    diagnostic = result.diagnostics[0]
    assert diagnostic.severity is Severity.ERROR
    assert diagnostic.source_ref == stray.source_ref
    assert "must begin with login/" in diagnostic.message
    assert result.table["shop/Cart"] == "com.x.Cart"
    assert not result.ok


def test_prefix_check_is_case_sensitive(declare: Declare) -> None:
    result = build_route_table([declare("Login/Action", "com.x.Action")], LOGIN)
    assert [diag.code for diag in result.diagnostics] == [DiagnosticCode.PREFIX_MISMATCH]


def test_duplicate_path_reports_once_and_last_wins(declare: Declare) -> None:
    first = declare("login/Same", "com.x.First", line=1)
    second = declare("login/Same", "com.x.Second", line=2)
    result = build_route_table([first, second], LOGIN)

    assert [diag.code for diag in result.diagnostics] == [DiagnosticCode.DUPLICATE_PATH]
    assert result.diagnostics[0].source_ref == second.source_ref
    assert "com.x.First" in result.diagnostics[0].message
    assert result.table["login/Same"] == "com.x.Second"
    assert len(result.table) == 1


def test_each_repeat_of_a_path_is_reported(declare: Declare) -> None:
    result = build_route_table(
        [declare("login/A", "a.One"), declare("login/A", "a.Two"), declare("login/A", "a.Three")],
        LOGIN,
    )
    assert [diag.code for diag in result.diagnostics] == [DiagnosticCode.DUPLICATE_PATH] * 2
    assert result.table["login/A"] == "a.Three"


def test_distinct_paths_in_same_module_do_not_conflict(declare: Declare) -> None:
    result = build_route_table([declare("login/A", "a.A"), declare("login/B", "a.B")], LOGIN)
    assert result.diagnostics == ()


def test_diagnostics_do_not_stop_validation(declare: Declare) -> None:
    result = build_route_table(
        [
            declare("other/A", "a.A"),
            declare("login/B", "a.B"),
            declare("login/B", "a.C"),
            declare("nope/D", "a.D"),
        ],
        LOGIN,
    )
    assert [diag.code for diag in result.diagnostics] == [
        DiagnosticCode.PREFIX_MISMATCH,
        DiagnosticCode.DUPLICATE_PATH,
        DiagnosticCode.PREFIX_MISMATCH,
    ]
    assert len(result.table) == 3


def test_table_order_is_canonical(declare: Declare) -> None:
    forward = [declare("login/b", "x.B"), declare("login/a", "x.A"), declare("login/c", "x.C")]
    first = build_route_table(forward, LOGIN)
    second = build_route_table(list(reversed(forward)), LOGIN)

    assert list(first.table) == ["login/a", "login/b", "login/c"]
    assert first.table.entries == second.table.entries


def test_accumulator_insert_returns_findings_for_that_declaration(declare: Declare) -> None:
    accumulator = RouteTableAccumulator(LOGIN)
    assert accumulator.insert(declare("login/A", "x.A")) == []
    findings = accumulator.insert(declare("login/A", "x.B"))
    assert [diag.code for diag in findings] == [DiagnosticCode.DUPLICATE_PATH]
    assert accumulator.result().table == RouteTable([("login/A", "x.B")])


def test_empty_input_yields_empty_table() -> None:
    result = build_route_table([], LOGIN)
    assert len(result.table) == 0
    assert result.ok


def test_accumulator_is_safe_under_concurrent_feeding(declare: Declare) -> None:
    workers = 8
    per_worker = 50
    distinct = 20
    accumulator = RouteTableAccumulator(LOGIN)

    def feed(worker: int) -> None:
        batch = [declare(f"login/R{index % distinct}", f"x.W{worker}R{index}") for index in range(per_worker)]
        if worker % 2:
            accumulator.merge(batch)
        else:
            for declaration in batch:
                accumulator.insert(declaration)

    with ThreadPoolExecutor(max_workers=workers) as pool:
        list(pool.map(feed, range(workers)))

    result = accumulator.result()
    total = workers * per_worker
    assert len(result.table) == distinct
    assert len(result.diagnostics) == total - distinct
    assert all(diag.code is DiagnosticCode.DUPLICATE_PATH for diag in result.diagnostics)
