"""Fixture loop and fail-fast batch loop over solutions."""

from __future__ import annotations

from pathlib import Path

from soltest.config import Config
from soltest.errors import PathNotFoundError
from soltest.executor import LocalExecutor, normalize_output, read_output
from soltest.executor_base import CommandExecutor
from soltest.languages import is_skipped, resolve_command
from soltest.logging_config import get_logger
from soltest.models import (
    BatchResult,
    ExecutionResult,
    FailureReason,
    Fixture,
    FixtureResult,
    Solution,
    SolutionReport,
    Verdict,
)
from soltest.report import Reporter

logger = get_logger(__name__)

INPUT_SUFFIX = ".in"
EXPECTED_SUFFIX = ".out"


def discover_fixtures(solution: Solution, data_dir_name: str = "data") -> list[Fixture]:
    """Pair every ``<name>.in`` in the data directory with its ``<name>.out``."""
    data_dir = solution.data_dir(data_dir_name)
    if not data_dir.is_dir():
        logger.debug("%s: no data directory at %s", solution.path, data_dir)
        return []
    fixtures = []
    for input_path in sorted(data_dir.glob(f"*{INPUT_SUFFIX}")):
        if not input_path.is_file():
            continue
        name = input_path.name[: -len(INPUT_SUFFIX)]
        fixtures.append(
            Fixture(
                name=name,
                input_path=input_path,
                expected_path=data_dir / f"{name}{EXPECTED_SUFFIX}",
            )
        )
    logger.debug("%s: found %d fixture(s) in %s", solution.path, len(fixtures), data_dir)
    return fixtures


class Runner:
    def __init__(
        self,
        config: Config,
        executor: CommandExecutor | None = None,
        reporter: Reporter | None = None,
    ) -> None:
        self.config = config
        self._executor: CommandExecutor = executor or LocalExecutor()
        self.reporter = reporter or Reporter(color=config.color)

    def run_batch(self, paths: list[str | Path]) -> BatchResult:
        """Check solutions in order, stopping after the first one with a failing fixture."""
        batch = BatchResult()
        for raw_path in paths:
            path = Path(raw_path)
            if not path.exists():
                raise PathNotFoundError(path)
            solution = Solution(path)
            if is_skipped(solution):
                logger.debug("skipping %s", path)
                continue

            command = resolve_command(solution, self.config, self._executor)
            report = self.check_solution(solution, command)
            batch.reports.append(report)

            if report.failed:
                self.reporter.remediation(solution, self.config.data_dir_name)
                batch.aborted = True
                break
        return batch

    def check_solution(self, solution: Solution, command: list[str]) -> SolutionReport:
        """Run every fixture of one solution; one failure does not stop the others."""
        self.reporter.heading(solution)
        report = SolutionReport(solution=solution)

        fixtures = discover_fixtures(solution, self.config.data_dir_name)
        if not fixtures:
            data_dir = solution.data_dir(self.config.data_dir_name)
            report.configuration_error = f"no *{INPUT_SUFFIX} fixtures found in {data_dir}"
            self.reporter.error(report.configuration_error)
            return report

        for fixture in fixtures:
            result = self.run_fixture(solution, command, fixture)
            self.reporter.fixture_result(result)
            report.results.append(result)
        return report

    def run_fixture(self, solution: Solution, command: list[str], fixture: Fixture) -> FixtureResult:
        stdout_log = solution.stdout_log(fixture.name)
        stderr_log = solution.stderr_log(fixture.name)

        argument = normalize_output(read_output(fixture.input_path))
        execution: ExecutionResult = self._executor.run(command, argument, stdout_log, stderr_log)

        reasons = []
        if execution.exit_code != 0:
            reasons.append(FailureReason.NON_ZERO_EXIT)
        if not fixture.expected_path.is_file():
            reasons.append(FailureReason.MISSING_EXPECTED)
        else:
            expected = read_output(fixture.expected_path)
            if not self._executor.outputs_match(expected, execution.stdout):
                reasons.append(FailureReason.OUTPUT_MISMATCH)

        if reasons:
            return FixtureResult(fixture, execution, Verdict.FAILED, reasons)

        for log in (stdout_log, stderr_log):
            log.unlink(missing_ok=True)
        logger.debug("%s: removed logs for passing fixture %s", solution.path, fixture.name)
        return FixtureResult(fixture, execution, Verdict.PASSED)
