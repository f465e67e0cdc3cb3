"""
Configuration schema for the rectscan CLI.

This module defines the optional YAML configuration: report formatting,
logging level and rendering style. Every section and every key is optional;
missing values fall back to the dataclass defaults.
"""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Union

import supervision as sv
import yaml


_HEX_COLOR = re.compile(r"^#[0-9A-Fa-f]{6}$")

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class OutputConfig:
    """JSON report formatting. indent 0 prints the report on one line."""

    indent: int = 2

    def __post_init__(self):
        """Validate output configuration."""
        if isinstance(self.indent, bool) or not isinstance(self.indent, int):
            raise ValueError(f"indent must be an integer, got {self.indent!r}")
        if not 0 <= self.indent <= 8:
            raise ValueError(f"indent must be in [0, 8], got {self.indent}")


@dataclass(frozen=True)
class LoggingConfig:
    """Structured logging configuration."""

    level: str = "WARNING"

    def __post_init__(self):
        """Validate logging configuration."""
        if str(self.level).upper() not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid logging level: {self.level}. "
                f"Must be one of {VALID_LOG_LEVELS}"
            )

    @property
    def level_value(self) -> int:
        """Numeric level for the logging module."""
        return getattr(logging, str(self.level).upper())


@dataclass(frozen=True)
class RenderConfig:
    """
    Rendering style for --render output.

    Colors are "#RRGGBB" strings; scale is the preferred number of pixels
    per world unit and is reduced automatically to respect max_canvas_size.
    """

    scale: float = 20.0
    padding: int = 20
    max_canvas_size: int = 4096
    thickness: int = 2
    opacity: float = 0.35
    area_color: str = "#00C800"
    intersection_color: str = "#DC0000"
    text_color: str = "#000000"
    background_color: str = "#FFFFFF"
    draw_labels: bool = True

    def __post_init__(self):
        """Validate render configuration."""
        for name in ("padding", "max_canvas_size", "thickness"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")

        for name in ("scale", "opacity"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{name} must be a number, got {value!r}")

        if not isinstance(self.draw_labels, bool):
            raise ValueError(f"draw_labels must be true or false, got {self.draw_labels!r}")

        if self.scale <= 0:
            raise ValueError(f"scale must be > 0, got {self.scale}")

        if self.padding < 0:
            raise ValueError(f"padding must be >= 0, got {self.padding}")

        if not 64 <= self.max_canvas_size <= 8192:
            raise ValueError(
                f"max_canvas_size must be in [64, 8192], got {self.max_canvas_size}"
            )

        if self.max_canvas_size <= 2 * self.padding + 1:
            raise ValueError(
                f"padding ({self.padding}) leaves no room in a "
                f"{self.max_canvas_size}px canvas"
            )

        if self.thickness < 1:
            raise ValueError(f"thickness must be >= 1, got {self.thickness}")

        if not 0.0 <= self.opacity <= 1.0:
            raise ValueError(f"opacity must be in [0.0, 1.0], got {self.opacity}")

        for name in ("area_color", "intersection_color", "text_color", "background_color"):
            value = getattr(self, name)
            if not isinstance(value, str) or not _HEX_COLOR.match(value):
                raise ValueError(f"{name} must be a '#RRGGBB' string, got {value!r}")

    def color(self, name: str) -> sv.Color:
        """Return the named color field as a supervision Color."""
        return sv.Color.from_hex(getattr(self, name))


@dataclass(frozen=True)
class AppConfig:
    """
    Main configuration for the rectscan CLI.

    Immutable after construction (frozen dataclass).
    """

    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    render: RenderConfig = field(default_factory=RenderConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """
        Build configuration from parsed YAML.

        Raises:
            ValueError: If a section is unknown, not a mapping, or holds
                unknown or invalid keys
        """
        if data is None:
            return cls()

        if not isinstance(data, dict):
            raise ValueError(f"Config root must be a mapping, got {type(data).__name__}")

        sections = {
            "output": OutputConfig,
            "logging": LoggingConfig,
            "render": RenderConfig,
        }

        unknown = set(data) - set(sections)
        if unknown:
            raise ValueError(
                f"Unknown config sections: {sorted(unknown)}. "
                f"Must be among {sorted(sections)}"
            )

        parsed = {}
        for name, section_cls in sections.items():
            section_data = data.get(name) or {}
            if not isinstance(section_data, dict):
                raise ValueError(f"Config section '{name}' must be a mapping")
            try:
                parsed[name] = section_cls(**section_data)
            except TypeError as e:
                raise ValueError(f"Invalid config section '{name}': {e}") from e

        return cls(**parsed)

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> "AppConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            output:
              indent: 2

            logging:
              level: "INFO"

            render:
              scale: 10.0
              padding: 30
              area_color: "#00C800"
              intersection_color: "#DC0000"
              draw_labels: true

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the YAML or any value is invalid
        """
        path = Path(yaml_path)

        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {yaml_path}: {e}") from e

        return cls.from_dict(data)
