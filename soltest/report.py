"""Coloured terminal reporting for test runs."""

from __future__ import annotations

import sys
from typing import TextIO

from soltest.models import FailureReason, FixtureResult, Solution

GREEN = "\033[32m"
RED = "\033[31m"
BOLD = "\033[1m"
RESET = "\033[0m"


def color_enabled(mode: str, stream: TextIO) -> bool:
    if mode == "always":
        return True
    if mode == "never":
        return False
    return hasattr(stream, "isatty") and stream.isatty()


class Reporter:
    """Writes per-fixture results and batch messages to a terminal stream."""

    def __init__(self, stream: TextIO | None = None, color: str = "auto") -> None:
        self.stream = stream or sys.stdout
        self.color = color_enabled(color, self.stream)

    def _paint(self, text: str, *codes: str) -> str:
        if not self.color:
            return text
        return "".join(codes) + text + RESET

    def _write(self, text: str) -> None:
        print(text, file=self.stream, flush=True)

    def heading(self, solution: Solution) -> None:
        self._write(self._paint(f"Testing {solution.path}", BOLD))

    def success(self, message: str) -> None:
        self._write(f"  {self._paint('PASS', GREEN)}: {message}")

    def failure(self, message: str) -> None:
        self._write(f"  {self._paint('FAIL', RED)}: {message}")

    def error(self, message: str) -> None:
        self._write(f"{self._paint('Error:', RED, BOLD)} {message}")

    def fixture_result(self, result: FixtureResult) -> None:
        name = result.fixture.name
        if result.passed:
            self.success(name)
            return
        self.failure(f"{name} ({', '.join(describe_reason(r, result) for r in result.reasons)})")

    def remediation(self, solution: Solution, data_dir_name: str) -> None:
        data_dir = solution.data_dir(data_dir_name)
        lines = [
            "",
            self._paint("Some fixtures failed. Compare the files below:", RED, BOLD),
            f"  input:    {data_dir / '<name>.in'}",
            f"  expected: {data_dir / '<name>.out'}",
            f"  stdout:   {solution.stdout_log('<name>')}",
            f"  stderr:   {solution.stderr_log('<name>')}",
            "Remaining solutions were not tested.",
        ]
        for line in lines:
            self._write(line)


def describe_reason(reason: FailureReason, result: FixtureResult) -> str:
    if reason == FailureReason.NON_ZERO_EXIT:
        return f"exited with status {result.execution.exit_code}"
    if reason == FailureReason.OUTPUT_MISMATCH:
        return "output differs from expected"
    if reason == FailureReason.MISSING_EXPECTED:
        return f"missing {result.fixture.expected_path.name}"
    raise AssertionError(f"unhandled failure reason {reason}")
