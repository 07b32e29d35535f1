"""Settings file loader."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from patchscan.domain.exceptions import InvalidSettingsError
from patchscan.domain.model.settings import ScannerSettings

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def load_settings(path: Path) -> ScannerSettings:
    """Load scanner settings from a JSON file.

    Missing file = defaults.

    Args:
        path: Settings file.

    Returns:
        ScannerSettings

    Raises:
        InvalidSettingsError: If the file is unreadable, not a JSON object,
            or holds an invalid value.
    """
    if not path.exists():
        logger.debug(f"No settings file at {path}, using defaults")
        return ScannerSettings()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise InvalidSettingsError(str(path), str(exc)) from exc

    if not isinstance(data, dict):
        raise InvalidSettingsError(str(path), "top-level value must be an object")

    return ScannerSettings.from_mapping(data)
