"""Option flags for directory creation and removal."""

from __future__ import annotations

import enum


class CreateFlags(enum.Flag):
    """Options for Context.create_dir."""

    NONE = 0
    RECURSIVE = enum.auto()


class RemoveFlags(enum.Flag):
    """Options for Context.remove."""

    NONE = 0
    RECURSIVE = enum.auto()
