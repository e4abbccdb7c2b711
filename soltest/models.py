"""Data models for soltest."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path


class Verdict(enum.Enum):
    PASSED = "PASSED"
    FAILED = "FAILED"


class FailureReason(enum.Enum):
    NON_ZERO_EXIT = "NON_ZERO_EXIT"
    OUTPUT_MISMATCH = "OUTPUT_MISMATCH"
    MISSING_EXPECTED = "MISSING_EXPECTED"


@dataclass
class Solution:
    path: Path

    def __post_init__(self) -> None:
        self.path = Path(self.path)

    @property
    def extension(self) -> str:
        """File extension without the dot, "" when the name has none."""
        name = self.path.name
        if "." not in name:
            return ""
        return name.rsplit(".", 1)[1]

    @property
    def directory(self) -> Path:
        return self.path.parent

    @property
    def binary(self) -> Path:
        return self.path.with_name(self.path.name + ".exe")

    def data_dir(self, name: str = "data") -> Path:
        return self.directory / name

    def stdout_log(self, fixture_name: str) -> Path:
        return self.path.with_name(f"{self.path.name}.{fixture_name}.out.log")

    def stderr_log(self, fixture_name: str) -> Path:
        return self.path.with_name(f"{self.path.name}.{fixture_name}.err.log")


@dataclass
class Fixture:
    name: str
    input_path: Path
    expected_path: Path


@dataclass
class ExecutionResult:
    stdout: str
    stderr: str
    exit_code: int


@dataclass
class FixtureResult:
    fixture: Fixture
    execution: ExecutionResult
    verdict: Verdict
    reasons: list[FailureReason] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.verdict == Verdict.PASSED


@dataclass
class SolutionReport:
    solution: Solution
    results: list[FixtureResult] = field(default_factory=list)
    configuration_error: str = ""  # set when no fixtures were found

    @property
    def failed(self) -> bool:
        return any(not r.passed for r in self.results)


@dataclass
class BatchResult:
    reports: list[SolutionReport] = field(default_factory=list)
    aborted: bool = False

    @property
    def exit_code(self) -> int:
        return 1 if any(r.failed for r in self.reports) else 0
