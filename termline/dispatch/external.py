# dispatch/external.py

import asyncio
import logging
from typing import List, Sequence

from ..session.output import OutputRecord

STDERR_PREFIX = "error: "

logger = logging.getLogger(__name__)


def _decode(data: bytes) -> List[str]:
    return data.decode("utf-8", errors="replace").splitlines()


def _describe_spawn_error(error: OSError) -> str:
    if isinstance(error, FileNotFoundError):
        return "command not found"
    if isinstance(error, PermissionError):
        return "permission denied"
    return error.strerror or str(error)


async def _terminate(process: asyncio.subprocess.Process) -> None:
    """Kill a child that is still running and reap it."""
    if process.returncode is None:
        try:
            process.kill()
        except ProcessLookupError:
            pass
    await process.wait()


async def run_external(command: str, args: Sequence[str], cwd: str) -> List[OutputRecord]:
    """
    Spawn `command` with `args` in `cwd`, wait for it, and turn its output
    into records.

    Cancelling the awaiting task kills the child before re-raising.
    """
    try:
        process = await asyncio.create_subprocess_exec(
            command, *args,
            cwd=cwd,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        logger.debug(f"Failed to spawn {command}: {e}")
        return [OutputRecord.error(f"{command}: {_describe_spawn_error(e)}")]

    try:
        stdout, stderr = await process.communicate()
    except asyncio.CancelledError:
        logger.debug(f"Cancelling {command} (pid {process.pid})")
        await asyncio.shield(_terminate(process))
        raise

    records = [OutputRecord.output(line) for line in _decode(stdout)]
    records.extend(
        OutputRecord.output(f"{STDERR_PREFIX}{line}")
        for line in _decode(stderr) if line.strip()
    )
    if process.returncode:
        records.append(
            OutputRecord.error(f"{command}: exited with status {process.returncode}")
        )
    logger.debug(f"{command} finished with status {process.returncode}")
    return records
