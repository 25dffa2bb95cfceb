"""Tests for taskshell.config."""

from __future__ import annotations

from pathlib import Path

import pydantic
import pytest

from taskshell import config
from taskshell.config import ShellConfig, resolve_tool


@pytest.fixture(autouse=True)
def _no_baked_env(monkeypatch):
    monkeypatch.setattr(config, "BAKED_ENV", {})


class TestFromEnv:
    def test_project_root_is_parent_of_manifest_dir(self):
        cfg = ShellConfig.from_env({"CARGO_MANIFEST_DIR": "/repo/xtask"})
        assert cfg.project_root == Path("/repo")

    def test_project_root_ascends_one_level(self):
        cfg = ShellConfig.from_env({"CARGO_MANIFEST_DIR": "/repo/crates/xtask"})
        assert cfg.project_root == Path("/repo/crates")

    def test_target_dir_default(self):
        cfg = ShellConfig.from_env({"CARGO_MANIFEST_DIR": "/repo/xtask"})
        assert cfg.target_dir == Path("/repo/target")

    def test_target_dir_override(self):
        env = {"CARGO_MANIFEST_DIR": "/repo/xtask", "CARGO_TARGET_DIR": "/tmp/out"}
        cfg = ShellConfig.from_env(env)
        assert cfg.target_dir == Path("/tmp/out")

    def test_relative_manifest_dir_made_absolute(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        cfg = ShellConfig.from_env({"CARGO_MANIFEST_DIR": "xtask"})
        assert cfg.project_root.resolve() == tmp_path.resolve()
        assert cfg.project_root.is_absolute()

    def test_missing_manifest_dir_exits(self):
        with pytest.raises(SystemExit, match="CARGO_MANIFEST_DIR"):
            ShellConfig.from_env({})

    def test_baked_manifest_dir_used_as_fallback(self, monkeypatch):
        monkeypatch.setattr(config, "BAKED_ENV", {"CARGO_MANIFEST_DIR": "/baked/xtask"})
        cfg = ShellConfig.from_env({})
        assert cfg.project_root == Path("/baked")

    def test_dry_run_absent(self):
        cfg = ShellConfig.from_env({"CARGO_MANIFEST_DIR": "/repo/xtask"})
        assert cfg.dry_run is False

    def test_dry_run_presence_only(self):
        cfg = ShellConfig.from_env({"CARGO_MANIFEST_DIR": "/repo/xtask", "DRY_RUN": ""})
        assert cfg.dry_run is True

    def test_frozen(self):
        cfg = ShellConfig.from_env({"CARGO_MANIFEST_DIR": "/repo/xtask"})
        with pytest.raises(pydantic.ValidationError):
            cfg.dry_run = True


class TestResolveTool:
    def test_env_override_wins(self, monkeypatch):
        monkeypatch.setattr(config, "BAKED_ENV", {"CARGO": "/baked/cargo"})
        assert resolve_tool({"CARGO": "/opt/cargo"}, "CARGO", "cargo") == "/opt/cargo"

    def test_baked_value_second(self, monkeypatch):
        monkeypatch.setattr(config, "BAKED_ENV", {"RUSTC": "/baked/rustc"})
        assert resolve_tool({}, "RUSTC", "rustc") == "/baked/rustc"

    def test_bare_name_last(self):
        assert resolve_tool({}, "RUSTC", "rustc") == "rustc"

    def test_from_env_resolves_tools(self):
        env = {"CARGO_MANIFEST_DIR": "/repo/xtask", "RUSTC": "/opt/rustc"}
        cfg = ShellConfig.from_env(env)
        assert cfg.rustc == "/opt/rustc"
        assert cfg.cargo == "cargo"
