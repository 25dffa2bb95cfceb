"""Chainable, single-use builder for an external command."""

from __future__ import annotations

import logging
import os
import shlex
import signal
import subprocess
import sys
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import TypeAlias

from .errors import ShellCommandError, ShellError, ShellIOError

logger = logging.getLogger(__name__)

StrPath: TypeAlias = str | os.PathLike[str]


def _describe_exit(returncode: int) -> str:
    if returncode >= 0:
        return f"Subprocess failed with the exit code {returncode}"
    # killed by a signal; no exit code is available
    try:
        name = signal.Signals(-returncode).name
    except ValueError:
        name = str(-returncode)
    return f"Subprocess failed with the exit code 0 (terminated by signal {name})"


class Subprocess:
    """A thin, chainable wrapper around a single subprocess.run call."""

    def __init__(
        self,
        program: StrPath,
        *,
        cwd: Path,
        env: Mapping[str, str],
        dry_run: bool = False,
    ) -> None:
        self.program = os.fspath(program)
        self.cwd = cwd
        self.dry_run = dry_run
        self._args: list[str] = []
        self._env: dict[str, str] = dict(env)
        self._silent = False
        self._consumed = False

    @property
    def argv(self) -> list[str]:
        """The program followed by its arguments."""
        return [self.program, *self._args]

    @property
    def environ(self) -> dict[str, str]:
        """The complete environment the child will receive."""
        return dict(self._env)

    @property
    def is_silent(self) -> bool:
        """Whether child output is discarded."""
        return self._silent

    def arg(self, value: StrPath) -> Subprocess:
        self._args.append(os.fspath(value))
        return self

    def args(self, values: Iterable[StrPath]) -> Subprocess:
        self._args.extend(os.fspath(v) for v in values)
        return self

    def env(self, key: str, value: str) -> Subprocess:
        """Set an environment variable for the child, replacing any earlier value."""
        self._env[key] = value
        return self

    def silent(self) -> Subprocess:
        """Discard the child's stdout and stderr."""
        self._silent = True
        return self

    def run(self) -> None:
        """Execute the command and wait for it to finish.

        Raises ShellIOError if the program cannot be started and
        ShellCommandError if it exits with a non-zero status.
        """
        if self._consumed:
            raise ShellError(f"Subprocess already run: {self}")
        self._consumed = True

        cmdline = shlex.join(self.argv)
        if self.dry_run:
            logger.info("[DRY RUN] Would run %s", cmdline)
            print(f"[taskshell] - skipped: {cmdline}", file=sys.stderr)
            return

        output = subprocess.DEVNULL if self._silent else None
        logger.debug("Running %s in '%s'", cmdline, self.cwd)
        try:
            proc = subprocess.run(
                self.argv,
                cwd=self.cwd,
                env=self._env,
                stdin=subprocess.DEVNULL,
                stdout=output,
                stderr=output,
                check=False,
            )
        except OSError as exc:
            raise ShellIOError(exc) from exc

        if proc.returncode != 0:
            raise ShellCommandError(
                _describe_exit(proc.returncode),
                argv=self.argv,
                returncode=proc.returncode,
            )

    def __repr__(self) -> str:
        return f"Subprocess({shlex.join(self.argv)!r}, cwd='{self.cwd}', dry_run={self.dry_run})"
