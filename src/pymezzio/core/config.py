# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Hierarchical configuration and defensive path lookup."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from pymezzio.kernel.exceptions import ConfigurationException

_MISSING = object()


class Config:
    """Hierarchical configuration with dot-notation access and env var overrides.

    Priority (highest wins):
    1. Environment variables (MEZZIO_SECTION_KEY format)
    2. Configuration dict / YAML file values
    """

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = dict(data) if data else {}
        self._loaded_sources: list[str] = []

    @property
    def loaded_sources(self) -> list[str]:
        """List of config file paths that were loaded, in merge order."""
        return list(self._loaded_sources)

    def to_dict(self) -> dict[str, Any]:
        """Return a shallow copy of the raw configuration data."""
        return dict(self._data)

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        active_profiles: list[str] | None = None,
    ) -> Config:
        """Load configuration from a YAML file plus optional profile overlays.

        For ``config/mezzio.yaml`` and profile ``dev`` the overlay
        ``config/mezzio-dev.yaml`` is merged on top when it exists.
        A missing base file yields an empty configuration.
        """
        path = Path(path)
        data: dict[str, Any] = {}
        sources: list[str] = []

        if path.exists():
            data = cls._load_config_data(path)
            sources.append(str(path))

            for profile in active_profiles or []:
                profile_path = path.parent / f"{path.stem}-{profile}{path.suffix}"
                if profile_path.exists():
                    data = cls._deep_merge(data, cls._load_config_data(profile_path))
                    sources.append(f"{profile_path} (profile: {profile})")

        instance = cls(data)
        instance._loaded_sources = sources
        return instance

    @staticmethod
    def _load_config_data(path: Path) -> dict[str, Any]:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ConfigurationException(
                f"Configuration file '{path}' must contain a mapping at the top level",
                code="CONFIG_NOT_A_MAPPING",
                context={"path": str(path)},
            )
        return data

    @staticmethod
    def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Recursively merge override into base, with override values winning."""
        merged = dict(base)
        for key, value in override.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                merged[key] = Config._deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dot-notation key, checking env vars first.

        An explicit ``null`` in the source data is returned as ``None``;
        *default* is only used when a path segment is missing.
        """
        env_val = self.env_override(key)
        if env_val is not None:
            return env_val
        return self.get_path(key.split("."), default)

    def get_path(self, path: Sequence[str], default: Any = None) -> Any:
        """Get a value by path segments, ignoring env vars.

        Segments are matched literally, so keys containing dots are reachable.
        """
        current: Any = self._data
        for part in path:
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current

    @staticmethod
    def env_override(key: str) -> str | None:
        """Environment value overriding dot-notation *key*, e.g. MEZZIO_ERROR_HANDLER_LAYOUT."""
        env_base = key.removeprefix("mezzio.")
        return os.environ.get("MEZZIO_" + env_base.upper().replace(".", "_").replace("-", "_"))

    def get_section(self, prefix: str) -> dict[str, Any]:
        """Get all values under a prefix as a dict."""
        current: Any = self._data
        for part in prefix.split("."):
            if isinstance(current, dict):
                current = current.get(part, {})
            else:
                return {}
        return current if isinstance(current, dict) else {}

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data


def lookup(config: Any, path: Sequence[str], default: Any = None) -> Any:
    """Walk *path* through *config* without ever raising.

    *config* may be a :class:`Config`, any ``Mapping`` or an arbitrary
    object implementing ``__getitem__``. A missing segment, a scalar in the
    middle of the path or an indexing error all yield *default*.
    """
    if isinstance(config, Config):
        env_val = config.env_override(".".join(path))
        if env_val is not None:
            return env_val
        return config.get_path(path, default)

    current = config
    for part in path:
        current = _lookup_segment(current, part)
        if current is _MISSING:
            return default
    return current


def _lookup_segment(container: Any, key: str) -> Any:
    if isinstance(container, Config):
        return container.get_path((key,), _MISSING)
    if isinstance(container, Mapping):
        return container.get(key, _MISSING)
    if isinstance(container, (str, bytes)) or not hasattr(container, "__getitem__"):
        return _MISSING
    try:
        value = container[key]
    except (KeyError, IndexError, TypeError):
        return _MISSING
    return _MISSING if value is None and not _has_key(container, key) else value


def _has_key(container: Any, key: str) -> bool:
    """Indexable objects without ``__contains__`` report ``None`` as absent."""
    if not hasattr(container, "__contains__"):
        return False
    try:
        return key in container
    except TypeError:
        return False
