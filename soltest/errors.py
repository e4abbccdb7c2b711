"""Exception hierarchy for soltest.

Every fatal error carries the process exit status the CLI terminates with.
The values follow the BSD ``sysexits.h`` convention.
"""

EX_USAGE = 64
EX_DATAERR = 65
EX_UNAVAILABLE = 69


class SoltestError(Exception):
    """Base exception for all fatal soltest errors."""

    exit_code = 1


class UsageError(SoltestError):
    """Raised when the command line is missing arguments or is malformed."""

    exit_code = EX_USAGE


class VersionCheckError(SoltestError):
    """Raised when a toolchain is older than the version a language requires."""

    exit_code = EX_USAGE


class PathNotFoundError(SoltestError):
    """Raised when a solution path given on the command line does not exist."""

    exit_code = EX_DATAERR

    def __init__(self, path) -> None:
        super().__init__(f"{path}: no such file or directory")
        self.path = path


class ToolMissingError(SoltestError):
    """Raised when a compiler, runtime or interpreter is not on PATH."""

    exit_code = EX_UNAVAILABLE

    def __init__(self, tool: str) -> None:
        super().__init__(f"required tool '{tool}' was not found on PATH")
        self.tool = tool


class NotExecutableError(SoltestError):
    """Raised when a program cannot be executed, e.g. it lacks the executable bit."""

    exit_code = EX_UNAVAILABLE

    def __init__(self, path, reason: str | None = None) -> None:
        if reason is None:
            message = f"{path}: unknown file type and not executable (try: chmod +x {path})"
        else:
            message = f"{path}: cannot execute: {reason}"
        super().__init__(message)
        self.path = path
        self.reason = reason


class CompilationError(SoltestError):
    """Raised when a build step fails; exits with the compiler's own status."""

    def __init__(self, command: list[str], returncode: int) -> None:
        super().__init__(f"compilation failed with exit status {returncode}: {' '.join(command)}")
        self.command = command
        self.returncode = returncode
        self.exit_code = returncode if returncode > 0 else 1
