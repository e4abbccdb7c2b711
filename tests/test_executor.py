"""Tests for the local executor."""

import pytest

from soltest.errors import CompilationError, NotExecutableError, ToolMissingError
from soltest.executor import LocalExecutor, compile_command, outputs_match, read_output, run_command

from conftest import write_solution


def test_outputs_match_exact():
    assert outputs_match("42", "42")


def test_outputs_match_trailing_newlines():
    assert outputs_match("5\n", "5")
    assert outputs_match("5", "5\n\n\n")
    assert outputs_match("a\nb\n", "a\nb")


def test_outputs_match_is_otherwise_strict():
    assert not outputs_match("5 ", "5")
    assert not outputs_match(" 5", "5")
    assert not outputs_match("5\r\n", "5")
    assert not outputs_match("a\n\nb", "a\nb")
    assert not outputs_match("42", "43")


def test_run_passes_input_as_single_argument(tmp_path):
    script = write_solution(tmp_path, "args.sh", '#!/bin/sh\necho "$#"\necho "$1"\n')
    out, err = tmp_path / "out.log", tmp_path / "err.log"
    result = run_command([str(script)], "2 3\n4", out, err)
    assert result.exit_code == 0
    assert result.stdout == "1\n2 3\n4\n"
    assert out.read_text() == result.stdout


def test_run_does_not_feed_stdin(tmp_path):
    script = write_solution(tmp_path, "stdin.sh", '#!/bin/sh\ncat\necho done\n')
    result = run_command([str(script)], "ignored", tmp_path / "o", tmp_path / "e")
    assert result.stdout == "done\n"


def test_run_captures_stderr_and_exit_code(tmp_path):
    script = write_solution(tmp_path, "crash.sh", '#!/bin/sh\necho boom >&2\nexit 3\n')
    out, err = tmp_path / "out.log", tmp_path / "err.log"
    result = run_command([str(script)], "", out, err)
    assert result.exit_code == 3
    assert result.stderr == "boom\n"
    assert err.read_text() == "boom\n"
    assert result.stdout == ""


def test_run_missing_program(tmp_path):
    with pytest.raises(ToolMissingError):
        run_command(["soltest-no-such-program"], "", tmp_path / "o", tmp_path / "e")


def test_compile_success(tmp_path):
    compile_command(["sh", "-c", "exit 0"])


def test_compile_failure_carries_status():
    with pytest.raises(CompilationError) as exc_info:
        compile_command(["sh", "-c", "exit 4"])
    assert exc_info.value.returncode == 4
    assert exc_info.value.exit_code == 4


def test_compile_missing_compiler():
    with pytest.raises(ToolMissingError) as exc_info:
        compile_command(["soltest-no-such-compiler", "x.c"])
    assert exc_info.value.tool == "soltest-no-such-compiler"


def test_local_executor_delegates(tmp_path):
    executor = LocalExecutor()
    script = write_solution(tmp_path, "echo.sh", '#!/bin/sh\necho "$1"\n')
    result = executor.run([str(script)], "hi", tmp_path / "o", tmp_path / "e")
    assert executor.outputs_match("hi", result.stdout)


def test_script_without_shebang_runs_with_sh(tmp_path):
    script = write_solution(tmp_path, "s", 'echo "got $1"\n')
    result = run_command([str(script)], "5", tmp_path / "o", tmp_path / "e")
    assert result.exit_code == 0
    assert result.stdout == "got 5\n"


def test_run_unexecutable_program(tmp_path):
    script = write_solution(tmp_path, "s.sh", "#!/bin/sh\necho 5\n", executable=False)
    with pytest.raises(NotExecutableError) as exc_info:
        run_command([str(script)], "", tmp_path / "o", tmp_path / "e")
    assert exc_info.value.exit_code == 69


def test_compile_unexecutable_compiler(tmp_path):
    compiler = write_solution(tmp_path, "cc", "#!/bin/sh\n", executable=False)
    with pytest.raises(NotExecutableError):
        compile_command([str(compiler), "a.c"])


def test_read_output_is_byte_exact(tmp_path):
    path = tmp_path / "out.log"
    path.write_bytes(b"a\r\nb\r\xff\n")
    text = read_output(path)
    assert text == "a\r\nb\r\udcff\n"
    assert text.encode("utf-8", errors="surrogateescape") == b"a\r\nb\r\xff\n"
