"""Extension table mapping solution files to build and run commands."""

from __future__ import annotations

import enum
import os
import re
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from soltest.config import Config
from soltest.errors import NotExecutableError, ToolMissingError, VersionCheckError
from soltest.executor_base import CommandExecutor
from soltest.logging_config import get_logger
from soltest.models import Solution

logger = get_logger(__name__)

# Leftovers from earlier runs or IDEs; never treated as solutions.
SKIPPED_EXTENSIONS = frozenset({"exe", "iml", "log"})

MIN_JAVA_VERSION = 11


class BuildStrategy(enum.Enum):
    DIRECT = "direct"  # already executable, run in place
    COMPILE = "compile"  # compile to P.exe, run the binary
    COMPILE_RUNTIME = "compile-runtime"  # compile to P.exe, run it under a managed runtime
    INTERPRETER = "interpreter"  # hand the source to a toolchain or interpreter


@dataclass(frozen=True)
class Language:
    name: str
    strategy: BuildStrategy
    # Builds the compiler command line for compiled strategies.
    build: Callable[[Solution, Config], list[str]] | None = None
    # Runtime or interpreter prefix placed before the artifact or source.
    runner: tuple[str, ...] = ()
    min_version: int | None = None

    def required_tools(self, solution: Solution, config: Config) -> list[str]:
        tools = []
        if self.build is not None:
            tools.append(self.build(solution, config)[0])
        tools.extend(self.runner[:1])
        return tools


def _c_build(solution: Solution, config: Config) -> list[str]:
    return [config.cc, "-std=c18", "-Wall", "-Wextra", "-Werror", "-O2",
            "-o", str(solution.binary), str(solution.path)]


def _cxx_build(solution: Solution, config: Config) -> list[str]:
    return [config.cxx, "-std=c++17", "-Wall", "-Wextra", "-Werror", "-O2",
            "-o", str(solution.binary), str(solution.path)]


def _csharp_build(solution: Solution, config: Config) -> list[str]:
    return ["mcs", f"-out:{solution.binary}", str(solution.path)]


def _rust_build(solution: Solution, config: Config) -> list[str]:
    return ["rustc", "-O", "-o", str(solution.binary), str(solution.path)]


C = Language("C", BuildStrategy.COMPILE, build=_c_build)
CXX = Language("C++", BuildStrategy.COMPILE, build=_cxx_build)
CSHARP = Language("C#", BuildStrategy.COMPILE_RUNTIME, build=_csharp_build, runner=("mono",))
GO = Language("Go", BuildStrategy.INTERPRETER, runner=("go", "run"))
JAVA = Language("Java", BuildStrategy.INTERPRETER, runner=("java",), min_version=MIN_JAVA_VERSION)
RUST = Language("Rust", BuildStrategy.COMPILE, build=_rust_build)
SCALA = Language("Scala", BuildStrategy.INTERPRETER, runner=("scala",))
EXECUTABLE = Language("executable", BuildStrategy.DIRECT)

LANGUAGES: dict[str, Language] = {
    "c": C,
    "cc": CXX,
    "cpp": CXX,
    "cxx": CXX,
    "cs": CSHARP,
    "go": GO,
    "java": JAVA,
    "rs": RUST,
    "scala": SCALA,
}


def language_for(solution: Solution) -> Language:
    """Return the table entry for the solution's extension, or the executable default."""
    return LANGUAGES.get(solution.extension, EXECUTABLE)


def is_skipped(solution: Solution) -> bool:
    return solution.extension in SKIPPED_EXTENSIONS


def ensure_tools(tools: list[str]) -> None:
    for tool in tools:
        if shutil.which(tool) is None:
            raise ToolMissingError(tool)


def parse_java_version(output: str) -> int | None:
    """Extract the major version from ``java -version`` output.

    Handles both the legacy ``"1.8.0_292"`` scheme and the ``"17.0.2"`` scheme.
    """
    match = re.search(r'version "(\d+)(?:\.(\d+))?', output)
    if not match:
        return None
    major = int(match.group(1))
    if major == 1 and match.group(2) is not None:
        return int(match.group(2))
    return major


def check_java_version(minimum: int = MIN_JAVA_VERSION) -> int:
    # java prints its version banner on stderr
    result = subprocess.run(
        ["java", "-version"],
        stdin=subprocess.DEVNULL,
        capture_output=True,
        text=True,
    )
    version = parse_java_version(result.stderr + result.stdout)
    if version is None:
        raise VersionCheckError("could not determine the installed Java version")
    if version < minimum:
        raise VersionCheckError(
            f"Java {minimum} or newer is required to run single-file sources (found Java {version})"
        )
    logger.debug("java version %d", version)
    return version


def resolve_command(
    solution: Solution,
    config: Config,
    executor: CommandExecutor,
) -> list[str]:
    """Build the solution if its language needs it and return its run command."""
    language = language_for(solution)
    logger.debug("%s: %s (%s)", solution.path, language.name, language.strategy.value)

    ensure_tools(language.required_tools(solution, config))
    if language.min_version is not None:
        check_java_version(language.min_version)

    strategy = language.strategy
    if strategy == BuildStrategy.DIRECT:
        if not os.access(solution.path, os.X_OK):
            raise NotExecutableError(solution.path)
        return [_program(solution.path)]
    if strategy == BuildStrategy.INTERPRETER:
        return [*language.runner, str(solution.path)]

    if language.build is None:
        raise AssertionError(f"{language.name} has no build command for strategy {strategy}")
    executor.compile(language.build(solution, config))
    if strategy == BuildStrategy.COMPILE:
        return [_program(solution.binary)]
    if strategy == BuildStrategy.COMPILE_RUNTIME:
        return [*language.runner, str(solution.binary)]
    raise AssertionError(f"unhandled build strategy {strategy}")


def _program(path: Path) -> str:
    """Spell a bare file name as ./name so it is not looked up on PATH."""
    if path.is_absolute() or path.parent != Path("."):
        return str(path)
    return os.path.join(os.curdir, path.name)
