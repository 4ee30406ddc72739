"""Hatchling build hook that records the git commit in the package."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Any

from hatchling.builders.hooks.plugin.interface import BuildHookInterface

BUILD_INFO = "linepad/_build_info.py"


class BuildInfoHook(BuildHookInterface):
    """Writes linepad/_build_info.py, read by linepad.version at runtime."""

    def initialize(self, version: str, build_data: dict[str, Any]) -> None:
        root = Path(self.root)
        commit = self._git(root, "rev-parse", "HEAD")
        date = self._git(root, "show", "-s", "--format=%cI", "HEAD")
        (root / BUILD_INFO).write_text(
            "# Generated by hatch_build.py; do not edit.\n"
            f"COMMIT = {commit!r}\n"
            f"DATE = {date!r}\n",
            encoding="utf-8",
        )
        build_data.setdefault("artifacts", []).append(BUILD_INFO)

    @staticmethod
    def _git(root: Path, *args: str) -> str | None:
        try:
            out = subprocess.check_output(["git", *args], cwd=str(root), stderr=subprocess.DEVNULL)
        except (subprocess.CalledProcessError, FileNotFoundError, OSError):
            # Source tarballs have no .git; the version then reports "unknown"
            return None
        return out.decode().strip() or None
