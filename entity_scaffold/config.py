"""Entity scaffolder configuration.

Centralised, typed configuration for the scaffolder.  Settings use a
Pydantic v2 model so they are validated at construction time and can be
read from environment variables or from a JSON/YAML file.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

DEFAULT_BASE_CONTROLLER = "Symfony\\Bundle\\FrameworkBundle\\Controller\\AbstractController"
DEFAULT_MODIFIER = "private readonly"

_TRUTHY = {"1", "true", "yes", "on"}


class ScaffoldConfig(BaseModel):
    """Global scaffolder configuration.

    Instances are created once by the CLI (or by a test) and passed to the
    ``DescriptorFactory``, ``Renderer`` and ``ScaffoldWriter``.
    """

    root_namespace: str = Field(
        default="App", description="PHP namespace mapped to ``source_dir``"
    )
    source_dir: Path = Field(
        default=Path("src"), description="Directory generated files are written under"
    )
    file_extension: str = Field(default=".php")
    base_controller: str = Field(
        default=DEFAULT_BASE_CONTROLLER,
        description="Type every generated controller extends",
    )
    dependency_modifier: str = Field(
        default=DEFAULT_MODIFIER,
        description="Modifier of constructor-promoted dependencies",
    )
    strict_types: bool = Field(
        default=True, description="Emit ``declare(strict_types=1);``"
    )
    indent: str = Field(default="    ")

    @field_validator("root_namespace", "base_controller")
    @classmethod
    def _strip_separators(cls, value: str) -> str:
        return value.replace(".", "\\").strip("\\")

    @field_validator("file_extension")
    @classmethod
    def _check_extension(cls, value: str) -> str:
        if not value.startswith(".") or len(value) < 2:
            raise ValueError(f"file extension must look like '.php', got {value!r}")
        return value

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration as JSON and return the written path."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path, **overrides: Any) -> "ScaffoldConfig":
        """Load a configuration file.

        ``.yaml``/``.yml`` files are parsed with PyYAML, anything else as
        JSON.  Keyword *overrides* win over values from the file.
        """
        file_path = Path(path)
        raw = file_path.read_text(encoding="utf-8")
        if file_path.suffix.lower() in (".yaml", ".yml"):
            try:
                data = yaml.safe_load(raw) or {}
            except yaml.YAMLError as exc:
                raise ValueError(f"{file_path}: {exc}") from exc
        else:
            data = json.loads(raw)
        if not isinstance(data, dict):
            raise ValueError(f"{file_path}: expected a mapping at the top level")
        return cls.model_validate({**data, **overrides})

    @classmethod
    def from_env(cls, **overrides: Any) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            SCAFFOLD_ROOT_NAMESPACE, SCAFFOLD_SOURCE_DIR,
            SCAFFOLD_FILE_EXTENSION, SCAFFOLD_BASE_CONTROLLER,
            SCAFFOLD_STRICT_TYPES.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("SCAFFOLD_ROOT_NAMESPACE"):
            kwargs["root_namespace"] = os.environ["SCAFFOLD_ROOT_NAMESPACE"]
        if os.environ.get("SCAFFOLD_SOURCE_DIR"):
            kwargs["source_dir"] = Path(os.environ["SCAFFOLD_SOURCE_DIR"])
        if os.environ.get("SCAFFOLD_FILE_EXTENSION"):
            kwargs["file_extension"] = os.environ["SCAFFOLD_FILE_EXTENSION"]
        if os.environ.get("SCAFFOLD_BASE_CONTROLLER"):
            kwargs["base_controller"] = os.environ["SCAFFOLD_BASE_CONTROLLER"]
        if os.environ.get("SCAFFOLD_STRICT_TYPES"):
            kwargs["strict_types"] = os.environ["SCAFFOLD_STRICT_TYPES"].lower() in _TRUTHY
        kwargs.update(overrides)
        return cls(**kwargs)
