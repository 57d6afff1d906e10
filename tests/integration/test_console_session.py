from __future__ import annotations

import io

import pytest

from chaincalc import console
from chaincalc.core.config import CalculatorSettings
from chaincalc.main import create_calculator


def run_session(text: str, **overrides) -> str:
    settings = CalculatorSettings(_env_file=None, **overrides)
    stdout = io.StringIO()

    console.run_console(create_calculator(), io.StringIO(text), stdout, settings)

    return stdout.getvalue()


def test_single_operation_prints_result() -> None:
    output = run_session("1\n5\n+\n3\n3\n")

    assert output.startswith("=== Calculator ===")
    assert "Enter operator (+, -, *, x, X, %, /): " in output
    assert "The result is: 8.0" in output
    assert output.rstrip().endswith("Goodbye!")


def test_single_operation_reports_division_by_zero() -> None:
    output = run_session("1\n5\n/\n0\n3\n")

    assert "Error: Cannot divide by zero" in output
    assert "The result is" not in output


def test_unparseable_number_is_reported_as_invalid_input() -> None:
    output = run_session("1\nabc\n3\n")

    assert "Invalid input: abc" in output
    assert "Error:" not in output


def test_unknown_operator_is_reported() -> None:
    output = run_session("1\n5\n^\n3\n")

    assert "Error: Invalid operation: ^" in output


def test_chained_operations_accumulate() -> None:
    output = run_session("2\n5\n+\n3\nx\n2\nend\n3\n")

    assert "Current result: 5.0" in output
    assert "Current result: 8.0" in output
    assert "The final result is: 16.0" in output


def test_chain_survives_failed_step() -> None:
    output = run_session("2\n10\n/\n0\n+\n5\nEND\n3\n")

    assert "Error: Cannot divide by zero" in output
    assert "The final result is: 15.0" in output


def test_chain_reports_bad_operand_and_keeps_value() -> None:
    output = run_session("2\n4\n+\nfour\nend\n3\n")

    assert "Invalid input: four" in output
    assert "The final result is: 4.0" in output


def test_empty_operator_finishes_chain() -> None:
    output = run_session("2\n4\n\n3\n")

    assert "Error: Empty input is not allowed. Returning final result." in output
    assert "The final result is: 4.0" in output


def test_custom_end_command_and_title() -> None:
    output = run_session("2\n1\n-\n3\ndone\n3\n", chain_end_command="done", app_name="Calc")

    assert output.startswith("=== Calc ===")
    assert "or 'done' to finish" in output
    assert "The final result is: -2.0" in output


def test_wrong_choice_is_reported() -> None:
    output = run_session("9\n3\n")

    assert "Wrong choice." in output


def test_end_of_input_exits_cleanly() -> None:
    output = run_session("2\n4\n+\n")

    assert output.rstrip().endswith("Goodbye!")


def test_main_applies_cli_overrides(monkeypatch, capsys: pytest.CaptureFixture[str]) -> None:
    calls: list[tuple[str, bool]] = []
    monkeypatch.setattr(console, "configure_logging", lambda level, json_output: calls.append((level, json_output)))
    monkeypatch.setattr(console, "get_settings", lambda: CalculatorSettings(_env_file=None))
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n6\n%\n4\n3\n"))

    console.main(["--log-level", "debug", "--no-json-logs"])

    assert calls == [("DEBUG", False)]
    assert "The result is: 2.0" in capsys.readouterr().out
