"""Abstract executor interface for building and running solutions."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from soltest.models import ExecutionResult


@runtime_checkable
class CommandExecutor(Protocol):
    def compile(self, command: list[str]) -> None: ...

    def run(
        self,
        command: list[str],
        argument: str,
        stdout_path: Path,
        stderr_path: Path,
    ) -> ExecutionResult: ...

    def outputs_match(self, expected: str, actual: str) -> bool: ...
