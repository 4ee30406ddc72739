"""Version string for ``linepad --version``.

The release number comes from the installed distribution; the commit comes
from the checkout when running from git, or from ``_build_info`` written
by the build hook otherwise.
"""

from __future__ import annotations

import importlib.metadata
import subprocess
from pathlib import Path
from typing import NamedTuple, Optional


class BuildInfo(NamedTuple):
    commit: Optional[str]
    date: Optional[str]
    dirty: bool


def _run_git(args: list[str], cwd: Path) -> Optional[str]:
    try:
        out = subprocess.check_output(["git", *args], cwd=str(cwd), stderr=subprocess.DEVNULL)
    except (subprocess.CalledProcessError, FileNotFoundError, OSError):
        return None
    return out.decode().strip() or None


def _from_git_repo() -> Optional[BuildInfo]:
    here = Path(__file__).resolve().parent
    if _run_git(["rev-parse", "--show-toplevel"], cwd=here) is None:
        return None
    commit = _run_git(["rev-parse", "HEAD"], cwd=here)
    date = _run_git(["show", "-s", "--format=%cI", "HEAD"], cwd=here)
    dirty = bool(_run_git(["status", "--porcelain"], cwd=here))
    return BuildInfo(commit=commit, date=date, dirty=dirty)


def _from_embedded_file() -> Optional[BuildInfo]:
    try:
        from . import _build_info  # type: ignore
    except ImportError:
        return None
    commit = getattr(_build_info, "COMMIT", None)
    date = getattr(_build_info, "DATE", None)
    if commit or date:
        return BuildInfo(commit=commit, date=date, dirty=False)
    return None


def get_build_info() -> BuildInfo:
    for getter in (_from_git_repo, _from_embedded_file):
        info = getter()
        if info and (info.commit or info.date):
            return info
    return BuildInfo(commit=None, date=None, dirty=False)


def get_release() -> str:
    try:
        return importlib.metadata.version("linepad")
    except importlib.metadata.PackageNotFoundError:
        return "0+unknown"


def get_version_string() -> str:
    info = get_build_info()
    # Short (7-character) git hashes
    commit = info.commit[:7] if info.commit else "unknown"
    if info.dirty:
        commit += "-dirty"
    return f"linepad {get_release()} ({commit} {info.date or 'unknown'})"
