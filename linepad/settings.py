"""Settings persistence for per-document editor state.

Remembers where the cursor was in each document so that reopening a file
puts the cursor back. Settings are stored in an OS-appropriate location
and survive application restarts.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

logger = logging.getLogger(__name__)

CURSOR_ROW = "cursor_row"
CURSOR_COL = "cursor_col"


class SettingsPersistence:
    """Manages persistent storage of per-document settings.

    Settings are stored in a JSON file in the user's config directory,
    indexed by the absolute path of the document being edited.
    """

    def __init__(self, config_dir: Optional[Path] = None):
        self._config_dir = config_dir or Path(platformdirs.user_config_dir("linepad"))
        self._settings_file = self._config_dir / "settings.json"
        self._settings_cache: Optional[Dict[str, Dict[str, Any]]] = None

    def _ensure_config_dir(self) -> None:
        try:
            self._config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning("Could not create config directory %s: %s", self._config_dir, e)

    def _load_all_settings(self) -> Dict[str, Dict[str, Any]]:
        """Load all settings from disk.

        Returns:
            Dictionary mapping document paths to their settings.
            Returns empty dict if file doesn't exist or can't be read.
        """
        if self._settings_cache is not None:
            return self._settings_cache

        if not self._settings_file.exists():
            self._settings_cache = {}
            return self._settings_cache

        try:
            with open(self._settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Could not load settings from %s: %s", self._settings_file, e)
            self._settings_cache = {}
            return self._settings_cache

        if not isinstance(data, dict):
            logger.warning("Settings file has invalid format (not a dict), ignoring")
            data = {}
        self._settings_cache = data
        return self._settings_cache

    def _save_all_settings(self, settings: Dict[str, Dict[str, Any]]) -> bool:
        """Save all settings to disk atomically (temp file + rename)."""
        self._ensure_config_dir()
        temp_file = self._settings_file.with_suffix('.tmp')
        try:
            with open(temp_file, 'w', encoding='utf-8') as f:
                json.dump(settings, f, indent=2)
            temp_file.replace(self._settings_file)
        except OSError as e:
            logger.warning("Could not save settings to %s: %s", self._settings_file, e)
            try:
                if temp_file.exists():
                    temp_file.unlink()
            except OSError:
                logger.warning("Could not remove %s", temp_file)
            return False
        self._settings_cache = settings
        return True

    def load_settings(self, document_path: Optional[str]) -> Dict[str, Any]:
        """Load settings for a specific document.

        Returns:
            Copy of the document's settings; empty if there are none or
            ``document_path`` is None.
        """
        if document_path is None:
            return {}
        abs_path = os.path.abspath(document_path)
        doc_settings = self._load_all_settings().get(abs_path, {})
        if not isinstance(doc_settings, dict):
            logger.warning("Settings for %s are not a dict, ignoring", abs_path)
            return {}
        return doc_settings.copy()

    def save_settings(self, document_path: Optional[str], settings: Dict[str, Any]) -> bool:
        """Merge ``settings`` into the stored settings for a document.

        Returns:
            True if save was successful, False otherwise.
        """
        if document_path is None:
            return False
        abs_path = os.path.abspath(document_path)
        all_settings = dict(self._load_all_settings())
        merged = dict(all_settings.get(abs_path) or {})
        merged.update(settings)
        all_settings[abs_path] = merged
        return self._save_all_settings(all_settings)

    def load_cursor(self, document_path: Optional[str]) -> Optional[tuple[int, int]]:
        """Return the remembered ``(row, col)`` for a document, if valid."""
        settings = self.load_settings(document_path)
        row = settings.get(CURSOR_ROW)
        col = settings.get(CURSOR_COL)
        if not isinstance(row, int) or not isinstance(col, int) or row < 0 or col < 0:
            return None
        return (row, col)

    def save_cursor(self, document_path: Optional[str], row: int, col: int) -> bool:
        return self.save_settings(document_path, {CURSOR_ROW: row, CURSOR_COL: col})

    def clear_cache(self) -> None:
        """Clear the in-memory cache of settings."""
        self._settings_cache = None


# Global instance
_persistence: Optional[SettingsPersistence] = None


def get_persistence() -> SettingsPersistence:
    """Get the global settings persistence instance."""
    global _persistence
    if _persistence is None:
        _persistence = SettingsPersistence()
    return _persistence
