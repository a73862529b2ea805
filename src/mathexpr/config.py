"""Engine configuration."""

from __future__ import annotations

import decimal
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

DEFAULT_PRECISION = 28


@dataclass(frozen=True)
class EngineConfig:
    """Expression engine configuration.

    Attributes:
        precision: Significant digits kept by decimal arithmetic
    """

    precision: int = DEFAULT_PRECISION

    def __post_init__(self) -> None:
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise ValueError(f"precision must be an integer, got {self.precision!r}")
        if self.precision < 1:
            raise ValueError(f"precision must be positive, got {self.precision}")
        if self.precision > decimal.MAX_PREC:
            raise ValueError(
                f"precision must be at most {decimal.MAX_PREC}, got {self.precision}"
            )

    @classmethod
    def from_env(cls) -> EngineConfig:
        """Create config from environment variables.

        Resolution order:
        1. MATHEXPR_PRECISION env var
        2. Default: 28 significant digits
        """
        precision = os.environ.get("MATHEXPR_PRECISION")
        if precision:
            return cls(precision=_parse_int("MATHEXPR_PRECISION", precision))
        return cls()

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> EngineConfig:
        """Create config from a parsed mapping, ignoring unrelated keys."""
        if "precision" in data:
            return cls(precision=data["precision"])
        return cls()

    @classmethod
    def from_file(cls, path: Path) -> EngineConfig:
        """Create config from a YAML file.

        Raises:
            ValueError: If the file is not a YAML mapping or holds bad values
        """
        return cls.from_mapping(load_yaml(path))


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file that must contain a mapping (empty file is {}).

    Raises:
        ValueError: If the file is not valid YAML or not a mapping
    """
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ValueError(f"{path}: YAML parse error: {exc}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at top level")
    return data


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}")
