# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Bounded asynchronous wrappers around analyzer subprocess execution."""

from __future__ import annotations

import asyncio
import shutil
from asyncio.subprocess import Process
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final

from ruffqa.errors import ProcessError

DEFAULT_TIMEOUT: Final[float] = 100.0
DEFAULT_MAX_OUTPUT_BYTES: Final[int] = 100 * 1024 * 1024
RUFF_ABNORMAL_EXIT: Final[int] = 2
_READ_CHUNK: Final[int] = 64 * 1024


@dataclass(slots=True, frozen=True)
class ProcessOptions:
    """Immutable process execution options."""

    cwd: Path | None = None
    env: Mapping[str, str] | None = None
    timeout: float | None = DEFAULT_TIMEOUT
    max_output_bytes: int = DEFAULT_MAX_OUTPUT_BYTES

    def __post_init__(self) -> None:
        if self.timeout is not None and self.timeout < 0:
            raise ValueError("timeout must be non-negative")
        if self.max_output_bytes <= 0:
            raise ValueError("max_output_bytes must be positive")


@dataclass(slots=True, frozen=True)
class ProcessResult:
    """Captured output of a completed analyzer invocation."""

    command: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    def raise_for_failure(self, *, abnormal_exit: int = RUFF_ABNORMAL_EXIT) -> None:
        """Raise :class:`ProcessError` when the invocation must be treated as failed.

        Any standard-error output is authoritative over stdout. Exit statuses below
        ``abnormal_exit`` are accepted because the analyzer exits ``1`` whenever it
        reports violations.

        Args:
            abnormal_exit: Lowest exit status considered an abnormal termination.

        Raises:
            ProcessError: If stderr is non-empty or the exit status is abnormal.
        """

        if self.stderr:
            raise ProcessError(
                f"Command '{self.command[0]}' reported an error: {self.stderr.strip()}",
                command=self.command,
                returncode=self.returncode,
                stderr=self.stderr,
            )
        if self.returncode < 0 or self.returncode >= abnormal_exit:
            raise ProcessError(
                f"Command '{self.command[0]}' exited with status {self.returncode}",
                command=self.command,
                returncode=self.returncode,
                stderr=self.stderr,
            )


class _OutputLimitExceeded(Exception):
    """Internal signal raised when a stream exceeds the configured output budget."""

    def __init__(self, stream: str, limit: int) -> None:
        super().__init__(f"{stream} exceeded {limit} bytes")
        self.stream = stream
        self.limit = limit


def _resolve_executable(executable: str) -> str:
    """Return an absolute executable path.

    Args:
        executable: Executable name or path supplied by configuration.

    Returns:
        str: Absolute executable path.

    Raises:
        ProcessError: If the executable cannot be resolved on ``PATH``.
    """

    if not executable:
        raise ProcessError("analyzer executable is not configured")
    candidate = Path(executable).expanduser()
    if candidate.is_absolute():
        return str(candidate)
    resolved = shutil.which(executable)
    if resolved is None:
        raise ProcessError(f"Executable '{executable}' was not found on PATH", command=(executable,))
    return resolved


async def _feed(writer: asyncio.StreamWriter | None, payload: str | None) -> None:
    if writer is None:
        return
    try:
        if payload:
            writer.write(payload.encode("utf-8"))
            await writer.drain()
    except (BrokenPipeError, ConnectionResetError):
        # The child exited before consuming stdin; its output decides the outcome.
        pass
    finally:
        writer.close()


async def _read_capped(reader: asyncio.StreamReader | None, *, limit: int, stream: str) -> bytes:
    if reader is None:
        return b""
    buffer = bytearray()
    while chunk := await reader.read(_READ_CHUNK):
        if len(buffer) + len(chunk) > limit:
            raise _OutputLimitExceeded(stream, limit)
        buffer.extend(chunk)
    return bytes(buffer)


async def _kill(process: Process) -> None:
    if process.returncode is None:
        try:
            process.kill()
        except ProcessLookupError:
            pass
    await process.wait()


async def _abort(process: Process, tasks: Sequence[asyncio.Task[Any]]) -> None:
    """Cancel the pending I/O tasks and reap the child."""

    for task in tasks:
        task.cancel()
    await asyncio.gather(*tasks, return_exceptions=True)
    await _kill(process)


async def run_process(
    executable: str,
    args: Sequence[str],
    *,
    options: ProcessOptions | None = None,
    stdin: str | None = None,
) -> ProcessResult:
    """Run the analyzer to completion and capture its output.

    Exactly one payload channel is used: when ``stdin`` is given it is written
    to the child's standard input, which is then closed; otherwise the payload
    is expected to be referenced from ``args`` and the child gets no stdin.

    Args:
        executable: Analyzer executable name or path.
        args: Arguments passed to the analyzer.
        options: Working directory, environment, and resource limits.
        stdin: Text streamed to the child's standard input.

    Returns:
        ProcessResult: Exit status and decoded stdout/stderr.

    Raises:
        ProcessError: If the executable cannot be started, the invocation times
            out, or either stream exceeds the output budget.
    """

    resolved_options = options or ProcessOptions()
    command = (_resolve_executable(executable), *args)
    try:
        # Arguments are passed as a list; no shell expansion takes place.
        process = await asyncio.create_subprocess_exec(
            *command,
            cwd=str(resolved_options.cwd) if resolved_options.cwd is not None else None,
            env=dict(resolved_options.env) if resolved_options.env is not None else None,
            stdin=asyncio.subprocess.PIPE if stdin is not None else asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as exc:
        raise ProcessError(f"Unable to start '{command[0]}': {exc}", command=command) from exc

    limit = resolved_options.max_output_bytes
    tasks: list[asyncio.Task[Any]] = [
        asyncio.create_task(_feed(process.stdin, stdin)),
        asyncio.create_task(_read_capped(process.stdout, limit=limit, stream="stdout")),
        asyncio.create_task(_read_capped(process.stderr, limit=limit, stream="stderr")),
        asyncio.create_task(process.wait()),
    ]
    try:
        _, stdout, stderr, returncode = await asyncio.wait_for(
            asyncio.gather(*tasks),
            timeout=resolved_options.timeout,
        )
    except TimeoutError as exc:
        await _abort(process, tasks)
        raise ProcessError(
            f"Command '{command[0]}' timed out after {resolved_options.timeout:.1f}s",
            command=command,
        ) from exc
    except _OutputLimitExceeded as exc:
        await _abort(process, tasks)
        raise ProcessError(
            f"Command '{command[0]}' produced more than {exc.limit} bytes on {exc.stream}",
            command=command,
        ) from exc

    return ProcessResult(
        command=command,
        returncode=returncode,
        stdout=stdout.decode("utf-8", errors="replace"),
        stderr=stderr.decode("utf-8", errors="replace"),
    )


__all__ = [
    "DEFAULT_MAX_OUTPUT_BYTES",
    "DEFAULT_TIMEOUT",
    "ProcessOptions",
    "ProcessResult",
    "RUFF_ABNORMAL_EXIT",
    "run_process",
]
