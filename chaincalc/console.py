from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence, TextIO

from chaincalc.core.config import CalculatorSettings, get_settings
from chaincalc.core.exceptions import error_payload
from chaincalc.core.logging import configure_logging, session_scope
from chaincalc.main import create_calculator
from chaincalc.services.calculator import CalculatorService
from chaincalc.services.errors import CalculatorError, InvalidInputError
from chaincalc.services.operations import Operation

logger = logging.getLogger("chaincalc.console")


class _EndOfInput(Exception):
    pass


class ConsoleSession:
    def __init__(
        self,
        calculator: CalculatorService,
        stdin: TextIO,
        stdout: TextIO,
        settings: CalculatorSettings,
    ) -> None:
        self.calculator = calculator
        self.stdin = stdin
        self.stdout = stdout
        self.settings = settings

    def run(self) -> None:
        self._print(f"=== {self.settings.app_name} ===")
        while True:
            self._print("\nSelect mode:")
            self._print("1) Single operation")
            self._print("2) Chained operations")
            self._print("3) Exit")
            self._write("> ")

            try:
                choice = self._read_line().strip()
            except _EndOfInput:
                self._print("\nGoodbye!")
                return

            if choice == "3":
                self._print("Goodbye!")
                return

            handler = {"1": self.single_operation, "2": self.chained_operations}.get(choice)
            if handler is None:
                self._print("Wrong choice.")
                continue

            try:
                with session_scope():
                    handler()
            except _EndOfInput:
                self._print("\nGoodbye!")
                return

    def single_operation(self) -> None:
        try:
            self._print("Please enter the first number: ")
            first = self._read_number()

            self._write(f"Enter operator ({Operation.all_symbols()}): ")
            symbol = self._read_line().strip()
            op = Operation.from_symbol(symbol)

            self._print("Please enter the second number: ")
            second = self._read_number()

            result = self.calculator.calculate(op, first, second)
        except CalculatorError as exc:
            self._report(exc)
            return

        self._print(f"The result is: {result}")

    def chained_operations(self) -> None:
        try:
            self._print("Please enter the first number: ")
            chain = self.calculator.start(self._read_number())
        except CalculatorError as exc:
            self._report(exc)
            return

        self._print(f"Current result: {chain.get_result()}")
        end_command = self.settings.chain_end_command.lower()

        while True:
            self._write(
                f"Enter operation ({Operation.all_symbols()}) or '{self.settings.chain_end_command}' to finish: "
            )
            symbol = self._read_line().strip()
            if symbol.lower() == end_command:
                break
            if not symbol:
                self._print("Error: Empty input is not allowed. Returning final result.")
                break

            try:
                op = Operation.from_symbol(symbol)
                self._print("Please enter the second number: ")
                chain.chain(op, self._read_number())
            except CalculatorError as exc:
                self._report(exc)
                continue

            self._print(f"Current result: {chain.get_result()}")

        self._print(f"The final result is: {chain.get_result()}")

    def _report(self, exc: CalculatorError) -> None:
        logger.warning("step.failed", extra=error_payload(exc))
        if isinstance(exc, InvalidInputError):
            self._print(exc.message)
        else:
            self._print(f"Error: {exc.message}")

    def _read_number(self) -> float:
        text = self._read_line().strip()
        try:
            return float(text)
        except ValueError as exc:
            raise InvalidInputError(text) from exc

    def _read_line(self) -> str:
        line = self.stdin.readline()
        if not line:
            raise _EndOfInput()
        return line.rstrip("\r\n")

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def _print(self, text: str) -> None:
        self._write(f"{text}\n")


def run_console(
    calculator: CalculatorService,
    stdin: TextIO,
    stdout: TextIO,
    settings: CalculatorSettings | None = None,
) -> None:
    ConsoleSession(calculator, stdin, stdout, settings or get_settings()).run()


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Interactive calculator with operation chaining.")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override the configured log level (e.g. DEBUG, INFO, WARNING).",
    )
    parser.add_argument(
        "--json-logs",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Emit logs as JSON (default from CHAINCALC_LOG_JSON).",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    settings = get_settings()
    overrides = {}
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    if args.json_logs is not None:
        overrides["log_json"] = args.json_logs
    if overrides:
        settings = CalculatorSettings(**{**settings.model_dump(), **overrides})

    configure_logging(settings.log_level, settings.log_json)
    run_console(create_calculator(), sys.stdin, sys.stdout, settings)


if __name__ == "__main__":
    main()
