"""Reading and writing hold configurations and saved selections as JSON."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from holdmap.errors import ConfigurationLoadError
from holdmap.models.holds import DEFAULT_VERSION, HoldConfiguration, SelectedHolds

logger = logging.getLogger(__name__)

CONFIGURATION_FILENAME = "holds.json"


def configuration_to_json(config: HoldConfiguration) -> str:
    return config.model_dump_json(by_alias=True, indent=2)


def save_configuration(config: HoldConfiguration, path: str | Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(configuration_to_json(config), encoding="utf-8")
    logger.debug("Saved %d holds to %s", len(config.holds), path)
    return path


def load_configuration(path: str | Path) -> HoldConfiguration:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationLoadError(f"Cannot read hold configuration {path}: {e}") from e
    try:
        return HoldConfiguration.model_validate_json(text)
    except ValidationError as e:
        raise ConfigurationLoadError(f"Invalid hold configuration {path}: {e}") from e


def versioned_path(root: str | Path, version: str, name: str) -> Path:
    """``<root>/<version>/<name>``; versions are single path segments."""
    if not version or "/" in version or "\\" in version or version in (".", ".."):
        raise ConfigurationLoadError(f"Invalid version identifier: {version!r}")
    return Path(root) / version / name


def load_versioned_configuration(root: str | Path, version: str = DEFAULT_VERSION) -> HoldConfiguration:
    """Load ``<root>/<version>/holds.json``."""
    path = versioned_path(root, version, CONFIGURATION_FILENAME)
    try:
        return load_configuration(path)
    except ConfigurationLoadError as e:
        raise ConfigurationLoadError(
            f"Failed to load holds configuration for version '{version}': {e}"
        ) from e


def save_selected_holds(hold_ids: list[int], path: str | Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        SelectedHolds(selected_ids=list(hold_ids)).model_dump_json(by_alias=True), encoding="utf-8"
    )
    logger.debug("Saved selected holds %s to %s", hold_ids, path)
    return path


def load_selected_holds(path: str | Path) -> list[int] | None:
    """Saved selection, or None when nothing usable is stored."""
    path = Path(path)
    if not path.exists():
        return None
    try:
        return SelectedHolds.model_validate_json(path.read_text(encoding="utf-8")).selected_ids
    except (OSError, ValidationError) as e:
        logger.warning("Ignoring unreadable selection file %s: %s", path, e)
        return None
