"""Layered read-only configuration.

Framework-level properties live in ``<base>/framework.yaml`` and each
project's properties in ``<base>/projects/<name>/project.yaml``. Nested
YAML mappings are flattened to dotted keys, so these are equivalent:

    framework.ssh.timeout: 30000

    framework:
      ssh:
        timeout: 30000
"""

import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

import yaml

logger = logging.getLogger(__name__)

FRAMEWORK_FILE = "framework.yaml"
PROJECTS_DIR = "projects"
PROJECT_FILE = "project.yaml"


def _flatten(raw: Mapping[str, Any], prefix: str = "") -> dict[str, str]:
    """Flatten nested mappings into dotted keys with string values."""
    flat: dict[str, str] = {}
    for key, value in raw.items():
        name = f"{prefix}{key}"
        if isinstance(value, Mapping):
            flat.update(_flatten(value, f"{name}."))
        elif value is None:
            continue
        elif isinstance(value, bool):
            flat[name] = "true" if value else "false"
        else:
            flat[name] = str(value)
    return flat


@dataclass(frozen=True)
class Properties:
    """One read-only tier of the configuration hierarchy."""

    values: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "Properties":
        """Build properties from a (possibly nested) mapping."""
        return cls(values=_flatten(raw))

    @classmethod
    def from_yaml(cls, path: Path | str) -> "Properties":
        """Load properties from a YAML file.

        Args:
            path: YAML file to read

        Returns:
            Properties, empty if the file does not exist

        Raises:
            ValueError: If the document is not a mapping
        """
        path = Path(path)
        if not path.exists():
            logger.debug("Properties file not found: %s", path)
            return cls()

        with open(path) as f:
            raw = yaml.safe_load(f)

        if raw is None:
            return cls()
        if not isinstance(raw, Mapping):
            raise ValueError(f"Properties file must contain a mapping: {path}")

        props = cls.from_mapping(raw)
        logger.debug("Loaded %d properties from %s", len(props.values), path)
        return props

    def has_property(self, key: str) -> bool:
        return key in self.values

    def get_property(self, key: str) -> str | None:
        return self.values.get(key)


class Framework:
    """Framework-level properties plus lazily loaded project properties.

    Safe for concurrent readers: tiers are immutable once loaded and
    project loading is serialized.
    """

    def __init__(
        self,
        properties: Properties | None = None,
        projects: Mapping[str, Properties] | None = None,
        projects_dir: Path | str | None = None,
    ) -> None:
        """Initialize the framework configuration.

        Args:
            properties: Framework-level tier
            projects: Pre-built project tiers keyed by project name
            projects_dir: Directory holding ``<name>/project.yaml`` files
        """
        self.properties = properties or Properties()
        self.projects_dir = Path(projects_dir) if projects_dir else None
        self._projects: dict[str, Properties] = dict(projects or {})
        self._lock = threading.Lock()

    @classmethod
    def from_dir(cls, base_dir: Path | str) -> "Framework":
        """Load framework configuration from a base directory."""
        base = Path(base_dir).expanduser()
        properties = Properties.from_yaml(base / FRAMEWORK_FILE)
        logger.info("Framework configuration loaded from %s", base)
        return cls(properties=properties, projects_dir=base / PROJECTS_DIR)

    def has_property(self, key: str) -> bool:
        return self.properties.has_property(key)

    def get_property(self, key: str) -> str | None:
        return self.properties.get_property(key)

    def project(self, name: str) -> Properties:
        """Get the properties tier for a project.

        Unknown projects yield an empty tier.
        """
        with self._lock:
            props = self._projects.get(name)
            if props is None:
                if self.projects_dir is not None:
                    props = Properties.from_yaml(self.projects_dir / name / PROJECT_FILE)
                else:
                    props = Properties()
                self._projects[name] = props
            return props
