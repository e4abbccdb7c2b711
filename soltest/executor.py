"""Subprocess-based executor: blocking runs with output captured to log files."""

from __future__ import annotations

import errno
import subprocess
from pathlib import Path

from soltest.errors import CompilationError, NotExecutableError, ToolMissingError
from soltest.logging_config import get_logger
from soltest.models import ExecutionResult

logger = get_logger(__name__)


class LocalExecutor:
    """Runs build steps and solutions as local child processes."""

    def compile(self, command: list[str]) -> None:
        compile_command(command)

    def run(
        self,
        command: list[str],
        argument: str,
        stdout_path: Path,
        stderr_path: Path,
    ) -> ExecutionResult:
        return run_command(command, argument, stdout_path, stderr_path)

    def outputs_match(self, expected: str, actual: str) -> bool:
        return outputs_match(expected, actual)


def compile_command(command: list[str]) -> None:
    """Run a build command, letting the compiler's diagnostics reach the terminal."""
    logger.debug("compiling: %s", " ".join(command))
    try:
        result = subprocess.run(command, stdin=subprocess.DEVNULL)
    except FileNotFoundError:
        raise ToolMissingError(command[0]) from None
    except OSError as e:
        raise NotExecutableError(command[0], e.strerror) from None
    if result.returncode != 0:
        raise CompilationError(command, result.returncode)


def run_command(
    command: list[str],
    argument: str,
    stdout_path: Path,
    stderr_path: Path,
) -> ExecutionResult:
    """Run ``command`` with ``argument`` appended, capturing output to files.

    The fixture input is passed as a single argument rather than on stdin;
    stdin is connected to /dev/null. A program the kernel cannot execute
    (a script without a ``#!`` line) is run with ``sh``, as a shell would.
    """
    # argv cannot carry NUL bytes; command substitution drops them too
    full_command = [*command, argument.replace("\0", "")]
    logger.debug("running: %s <%d chars>", " ".join(command), len(argument))
    with open(stdout_path, "wb") as out, open(stderr_path, "wb") as err:
        try:
            result = _spawn(full_command, out, err)
        except OSError as e:
            if e.errno != errno.ENOEXEC:
                raise
            logger.debug("%s: exec format error, retrying with sh", command[0])
            result = _spawn(["sh", *full_command], out, err)
    return ExecutionResult(
        stdout=read_output(stdout_path),
        stderr=read_output(stderr_path),
        exit_code=result.returncode,
    )


def _spawn(command: list[str], out, err) -> subprocess.CompletedProcess:
    try:
        return subprocess.run(command, stdin=subprocess.DEVNULL, stdout=out, stderr=err)
    except FileNotFoundError:
        raise ToolMissingError(command[0]) from None
    except OSError as e:
        if e.errno == errno.ENOEXEC:
            raise
        raise NotExecutableError(command[0], e.strerror) from None


def read_output(path: Path) -> str:
    """Read a file byte-exactly: no newline translation, undecodable bytes kept.

    Bytes that are not UTF-8 become lone surrogates, so two files compare
    equal exactly when their bytes do, and the text converts back to the
    original bytes when passed as a process argument.
    """
    return Path(path).read_bytes().decode("utf-8", errors="surrogateescape")


def normalize_output(text: str) -> str:
    """Strip trailing newlines, as shell command substitution does."""
    return text.rstrip("\n")


def outputs_match(expected: str, actual: str) -> bool:
    """Compare expected and actual output exactly, ignoring trailing newlines only."""
    return normalize_output(expected) == normalize_output(actual)
