"""Runtime context for build-automation scripts."""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from .command import StrPath, Subprocess
from .config import DRY_RUN_VAR, ShellConfig
from .errors import ShellIOError
from .flags import CreateFlags, RemoveFlags

logger = logging.getLogger(__name__)


class Context:
    """Resolved project paths plus filesystem and subprocess helpers.

    The environment is captured once at construction. Every child process
    is started with that snapshot (plus per-command overrides) rather than
    the live environment of the calling process.
    """

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        snapshot = dict(os.environ if env is None else env)
        self._env = MappingProxyType(snapshot)
        self.config = ShellConfig.from_env(self._env)

    @property
    def env(self) -> Mapping[str, str]:
        """Read-only view of the environment snapshot."""
        return self._env

    @property
    def project_root(self) -> Path:
        return self.config.project_root

    @property
    def target_dir(self) -> Path:
        return self.config.target_dir

    @property
    def dry_run(self) -> bool:
        return self.config.dry_run

    def create_dir(self, path: StrPath, flags: CreateFlags = CreateFlags.NONE) -> None:
        """Create a directory, with all missing parents if RECURSIVE is set."""
        recursive = CreateFlags.RECURSIVE in flags
        logger.debug("Creating directory '%s' (recursive=%s)", path, recursive)
        try:
            if recursive:
                Path(path).mkdir(parents=True, exist_ok=True)
            else:
                Path(path).mkdir()
        except OSError as exc:
            raise ShellIOError(exc) from exc

    def write(self, path: StrPath, content: bytes | str) -> None:
        """Write content to a file, replacing anything already there."""
        if isinstance(content, str):
            content = content.encode("utf-8")
        logger.debug("Writing %d byte(s) to '%s'", len(content), path)
        try:
            Path(path).write_bytes(content)
        except OSError as exc:
            raise ShellIOError(exc) from exc

    def remove(self, path: StrPath, flags: RemoveFlags = RemoveFlags.NONE) -> None:
        """Remove a file or directory; missing paths are ignored."""
        path = Path(path)
        try:
            if path.is_symlink():
                logger.debug("Removing link '%s'", path)
                path.unlink()
            elif path.is_dir():
                if RemoveFlags.RECURSIVE in flags:
                    logger.debug("Removing directory tree '%s'", path)
                    shutil.rmtree(path)
                else:
                    logger.debug("Removing directory '%s'", path)
                    path.rmdir()
            elif path.is_file():
                logger.debug("Removing file '%s'", path)
                path.unlink()
            else:
                logger.debug("Skipping removal of '%s'; not present", path)
        except OSError as exc:
            raise ShellIOError(exc) from exc

    def subprocess(self, program: StrPath) -> Subprocess:
        """Prepare a command that runs in the project root."""
        return Subprocess(
            program,
            cwd=self.project_root,
            env=self._env,
            dry_run=DRY_RUN_VAR in self._env,
        )

    def rustc(self) -> Subprocess:
        return self.subprocess(self.config.rustc)

    def cargo(self) -> Subprocess:
        return self.subprocess(self.config.cargo)

    def __repr__(self) -> str:
        return f"Context(project_root='{self.project_root}', target_dir='{self.target_dir}', dry_run={self.dry_run})"
