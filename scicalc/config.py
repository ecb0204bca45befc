"""Calculator configuration.

Settings are read from the ``calculator`` section of
``.scicalc/config.json``, or from ``[tool.scicalc]`` in ``pyproject.toml``
when no config.json exists. Missing or unreadable files give defaults.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import toml

from .history import DEFAULT_CAPACITY


@dataclass
class CalculatorConfig:
    """Calculator behaviour options."""

    history_capacity: int = DEFAULT_CAPACITY
    max_digits: int = 16  # 0 = unlimited
    record_division_by_zero: bool = True

    def __post_init__(self):
        if self.history_capacity < 1:
            raise ValueError(f"history_capacity must be at least 1, got {self.history_capacity}")
        if self.max_digits < 0:
            raise ValueError(f"max_digits must not be negative, got {self.max_digits}")

    @classmethod
    def from_dict(cls, data: dict) -> "CalculatorConfig":
        defaults = cls()
        return cls(
            history_capacity=int(data.get("history_capacity", defaults.history_capacity)),
            max_digits=int(data.get("max_digits", defaults.max_digits)),
            record_division_by_zero=bool(
                data.get("record_division_by_zero", defaults.record_division_by_zero)
            ),
        )

    def to_dict(self) -> dict:
        return {
            "history_capacity": self.history_capacity,
            "max_digits": self.max_digits,
            "record_division_by_zero": self.record_division_by_zero,
        }


def _load_json_section(config_file: Path) -> Optional[dict]:
    try:
        with open(config_file) as f:
            data = json.load(f)
    except (json.JSONDecodeError, IOError):
        return None
    section = data.get("calculator") if isinstance(data, dict) else None
    return section if isinstance(section, dict) else None


def _load_pyproject_section(pyproject: Path) -> Optional[dict]:
    try:
        data = toml.load(str(pyproject))
    except (toml.TomlDecodeError, IOError):
        return None
    section = data.get("tool", {}).get("scicalc")
    return section if isinstance(section, dict) else None


def load_config(project_path: str = ".") -> CalculatorConfig:
    """Load calculator configuration for a project.

    Args:
        project_path: Path to project root.

    Returns:
        CalculatorConfig with settings from config.json, pyproject.toml or defaults.
    """
    root = Path(project_path)
    config_file = root / ".scicalc" / "config.json"
    pyproject = root / "pyproject.toml"

    section = None
    if config_file.exists():
        section = _load_json_section(config_file)
    elif pyproject.exists():
        section = _load_pyproject_section(pyproject)

    if section is None:
        return CalculatorConfig()

    try:
        return CalculatorConfig.from_dict(section)
    except (TypeError, ValueError):
        return CalculatorConfig()
