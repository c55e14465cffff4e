# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for bounded analyzer subprocess execution."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import pytest

from ruffqa.core.runtime.process import ProcessOptions, ProcessResult, run_process
from ruffqa.errors import ProcessError

PYTHON = sys.executable


@pytest.mark.asyncio
async def test_stdin_is_streamed_and_stdout_captured() -> None:
    script = "import sys; sys.stdout.write(sys.stdin.read().upper())"

    result = await run_process(PYTHON, ["-c", script], stdin="print('hi')\n")

    assert result.returncode == 0
    assert result.stdout == "PRINT('HI')\n"
    assert result.stderr == ""
    assert result.command[1:] == ("-c", script)


@pytest.mark.asyncio
async def test_working_directory_is_honoured(tmp_path: Path) -> None:
    result = await run_process(
        PYTHON,
        ["-c", "import os; print(os.getcwd())"],
        options=ProcessOptions(cwd=tmp_path),
    )

    assert Path(result.stdout.strip()).resolve() == tmp_path.resolve()


@pytest.mark.asyncio
async def test_violation_exit_status_is_not_a_failure() -> None:
    result = await run_process(PYTHON, ["-c", "import sys; print('[]'); sys.exit(1)"])

    result.raise_for_failure()
    assert result.returncode == 1


@pytest.mark.asyncio
async def test_abnormal_exit_status_is_a_failure() -> None:
    result = await run_process(PYTHON, ["-c", "import sys; sys.exit(2)"])

    with pytest.raises(ProcessError) as excinfo:
        result.raise_for_failure()
    assert excinfo.value.returncode == 2


@pytest.mark.asyncio
async def test_stderr_output_is_a_failure_even_on_success() -> None:
    result = await run_process(PYTHON, ["-c", "import sys; print('[]'); sys.stderr.write('warning: boom')"])

    assert result.returncode == 0
    with pytest.raises(ProcessError, match="boom"):
        result.raise_for_failure()


@pytest.mark.asyncio
async def test_timeout_kills_the_child() -> None:
    with pytest.raises(ProcessError, match="timed out"):
        await run_process(
            PYTHON,
            ["-c", "import time; time.sleep(30)"],
            options=ProcessOptions(timeout=0.5),
        )


@pytest.mark.asyncio
async def test_output_budget_is_enforced() -> None:
    with pytest.raises(ProcessError, match="more than 1024 bytes"):
        await run_process(
            PYTHON,
            ["-c", "import sys; sys.stdout.write('x' * 200000)"],
            options=ProcessOptions(max_output_bytes=1024),
        )


@pytest.mark.asyncio
async def test_missing_executable_raises() -> None:
    with pytest.raises(ProcessError, match="not found"):
        await run_process("ruffqa-definitely-missing-binary", ["check"])


def test_process_options_validation() -> None:
    with pytest.raises(ValueError):
        ProcessOptions(timeout=-1)
    with pytest.raises(ValueError):
        ProcessOptions(max_output_bytes=0)


def test_negative_return_code_is_a_failure() -> None:
    result = ProcessResult(command=("ruff",), returncode=-9, stdout="", stderr="")

    with pytest.raises(ProcessError):
        result.raise_for_failure()


def test_whitespace_only_stderr_is_a_failure() -> None:
    result = ProcessResult(command=("ruff",), returncode=0, stdout="[]", stderr="\n")

    with pytest.raises(ProcessError):
        result.raise_for_failure()


@pytest.mark.asyncio
async def test_overflowing_both_streams_leaves_no_pending_tasks() -> None:
    script = "import sys; sys.stderr.write('e' * 200000); sys.stdout.write('o' * 200000)"

    with pytest.raises(ProcessError, match="more than 1024 bytes"):
        await run_process(PYTHON, ["-c", script], options=ProcessOptions(max_output_bytes=1024))

    assert asyncio.all_tasks() == {asyncio.current_task()}
