"""Run external commands (git, gh) and surface their failures uniformly."""

import asyncio
import logging
import shlex
import sys
from dataclasses import dataclass
from typing import BinaryIO, List, Optional, Protocol, Sequence

from .typing import CommandFailedError

# Get module logger
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Exit status and captured stderr of a finished process."""
    returncode: int
    stderr: bytes = b""

    @property
    def success(self) -> bool:
        return self.returncode == 0


class CommandSpawner(Protocol):
    """Spawns a process with stdout discarded and stderr captured."""

    async def __call__(self, args: Sequence[str], cwd: Optional[str] = None) -> CommandResult:
        ...


class AsyncioSpawner:
    """Spawner backed by asyncio subprocesses."""

    async def __call__(self, args: Sequence[str], cwd: Optional[str] = None) -> CommandResult:
        proc = await asyncio.create_subprocess_exec(
            *args,
            stdout=asyncio.subprocess.DEVNULL,
            stderr=asyncio.subprocess.PIPE,
            cwd=cwd,
        )
        _, stderr = await proc.communicate()
        return CommandResult(proc.returncode if proc.returncode is not None else -1, stderr or b"")


class CommandRunner:
    """Runs commands through an injected spawner.

    On failure the command's stderr is copied verbatim to ``stream`` before
    CommandFailedError is raised, so the operator sees the tool's own output.
    Spawn and wait errors (OSError) are not caught.
    """

    def __init__(self, spawner: Optional[CommandSpawner] = None, stream: Optional[BinaryIO] = None):
        self.spawner: CommandSpawner = spawner if spawner is not None else AsyncioSpawner()
        self._stream = stream

    @property
    def stream(self) -> BinaryIO:
        # Resolved lazily so pytest's capture of sys.stderr is honoured
        if self._stream is not None:
            return self._stream
        return sys.stderr.buffer

    async def run(self, args: Sequence[str], cwd: Optional[str] = None) -> None:
        command: List[str] = list(args)
        logger.info(f"> {shlex.join(command)}")
        result = await self.spawner(command, cwd)
        if not result.success:
            logger.error(f"Command exited with status {result.returncode}: {shlex.join(command)}")
            self.stream.write(result.stderr)
            self.stream.flush()
            raise CommandFailedError(command, result.returncode, result.stderr)


async def run_command(args: Sequence[str], cwd: Optional[str] = None,
                      spawner: Optional[CommandSpawner] = None,
                      stream: Optional[BinaryIO] = None) -> None:
    """Run a command, raising CommandFailedError if it exits non-zero."""
    await CommandRunner(spawner, stream).run(args, cwd)
