"""Shell configuration resolved from an environment snapshot."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel

logger = logging.getLogger(__name__)

MANIFEST_DIR_VAR = "CARGO_MANIFEST_DIR"
TARGET_DIR_VAR = "CARGO_TARGET_DIR"
DRY_RUN_VAR = "DRY_RUN"
RUSTC_VAR = "RUSTC"
CARGO_VAR = "CARGO"

# Values present when the package was first imported; used when a snapshot lacks them.
BAKED_ENV: dict[str, str] = {
    name: os.environ[name] for name in (MANIFEST_DIR_VAR, RUSTC_VAR, CARGO_VAR) if name in os.environ
}


def resolve_tool(env: Mapping[str, str], var: str, default: str) -> str:
    """Resolve a tool path: snapshot override, then baked value, then the bare name."""
    if var in env:
        tool = env[var]
    elif var in BAKED_ENV:
        tool = BAKED_ENV[var]
    else:
        tool = default
    logger.debug("Resolved %s -> %s", var, tool)
    return tool


class ShellConfig(BaseModel):
    """Immutable settings for a single script run."""

    model_config = {"frozen": True}

    project_root: Path
    target_dir: Path
    dry_run: bool = False
    rustc: str = "rustc"
    cargo: str = "cargo"

    @classmethod
    def from_env(cls, env: Mapping[str, str]) -> ShellConfig:
        """Build a config from an environment snapshot.

        Exits the process if no manifest directory can be found, since nothing
        else can be resolved without a project root.
        """
        manifest_dir = env.get(MANIFEST_DIR_VAR) or BAKED_ENV.get(MANIFEST_DIR_VAR)
        if not manifest_dir:
            raise SystemExit(f"missing {MANIFEST_DIR_VAR}")

        project_root = Path(manifest_dir).absolute().parent
        if TARGET_DIR_VAR in env:
            target_dir = Path(env[TARGET_DIR_VAR]).absolute()
        else:
            target_dir = project_root / "target"
        logger.debug("Project root '%s'; target dir '%s'", project_root, target_dir)

        return cls(
            project_root=project_root,
            target_dir=target_dir,
            dry_run=DRY_RUN_VAR in env,
            rustc=resolve_tool(env, RUSTC_VAR, "rustc"),
            cargo=resolve_tool(env, CARGO_VAR, "cargo"),
        )
