"""
Configuration Loader - YAML Query Settings with Profiles.

Reads a QueryConfig from YAML, optionally overlays a named profile
(config/profiles/<name>.yaml under the base path), then validates the
result with Pydantic.

A relative dataset.path is taken relative to the file that declares it,
so a config and its dataset can be moved together.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from task_query.config.models import QueryConfig
from task_query.errors import InvalidArgument

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _deep_merge(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """Overlay wins; nested mappings are merged key by key."""
    merged = dict(base)
    for key, value in overlay.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = _deep_merge(current, value)
        else:
            merged[key] = value
    return merged


class ConfigLoader:
    """Loads query configuration files and their profiles."""

    def __init__(
        self,
        base_path: Optional[Path] = None,
        profiles_dir: PathLike = Path("config") / "profiles",
    ) -> None:
        """
        Args:
            base_path: Directory relative paths and profiles are resolved from
            profiles_dir: Profile directory, relative to base_path
        """
        self._base_path = Path(base_path) if base_path is not None else Path(".")
        self._profiles_dir = self._base_path / profiles_dir

    def load(self, config_path: PathLike, profile: Optional[str] = None) -> QueryConfig:
        """
        Load and validate a configuration file.

        Args:
            config_path: YAML file, absolute or relative to base_path
            profile: Profile name overlaid on the file's settings

        Raises:
            FileNotFoundError: If the file or the profile doesn't exist
            InvalidArgument: If a document is not a YAML mapping
            ValidationError: If a setting is out of range
        """
        path = self._resolve(config_path)
        settings = self._anchor_dataset(self._read(path), path)

        if profile:
            profile_path = self._profiles_dir / f"{profile}.yaml"
            if not profile_path.exists():
                raise FileNotFoundError(f"Profile not found: {profile}")
            overlay = self._anchor_dataset(self._read(profile_path), profile_path)
            settings = _deep_merge(settings, overlay)

        config = QueryConfig.model_validate(settings)
        logger.info(
            f"Loaded query config {path.name}"
            + (f" with profile '{profile}'" if profile else "")
        )
        return config

    def load_from_dict(self, settings: Dict[str, Any]) -> QueryConfig:
        """Validate settings that are already in memory."""
        return QueryConfig.model_validate(settings)

    def _resolve(self, path: PathLike) -> Path:
        candidate = Path(path)
        return candidate if candidate.is_absolute() else self._base_path / candidate

    @staticmethod
    def _read(path: Path) -> Dict[str, Any]:
        with open(path, encoding="utf-8") as f:
            document = yaml.safe_load(f)
        if document is None:
            return {}
        if not isinstance(document, dict):
            raise InvalidArgument(
                f"{path.name} must hold a YAML mapping, got {type(document).__name__}",
                field="config",
            )
        return document

    @staticmethod
    def _anchor_dataset(settings: Dict[str, Any], source: Path) -> Dict[str, Any]:
        dataset = settings.get("dataset")
        if not isinstance(dataset, dict) or not dataset.get("path"):
            return settings
        dataset_path = Path(dataset["path"])
        if dataset_path.is_absolute():
            return settings
        anchored = dict(settings)
        anchored["dataset"] = {**dataset, "path": str(source.parent / dataset_path)}
        return anchored


def load_config(
    config_path: PathLike,
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
) -> QueryConfig:
    """Load a QueryConfig in one call. See ConfigLoader.load."""
    return ConfigLoader(base_path=base_path).load(config_path, profile)
