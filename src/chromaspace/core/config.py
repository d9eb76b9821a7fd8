"""
Editor configuration.

Defaults for the saved colors list, interpolation and undo, loadable from
and savable to JSON files.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

from chromaspace.core.conversions import RGB, clamp_rgb

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class EditorConfig:
    """
    Editor settings.

    Attributes:
        initial_rgb: Color of the first point and of newly added points
        interpolation_steps: Samples per segment including both endpoints
        min_interpolation_points: User points required for interpolation
        undo_limit: Maximum commands kept on the undo stack
        log_level: Level passed to logging setup
    """

    initial_rgb: RGB = (127.0, 127.0, 127.0)
    interpolation_steps: int = 10
    min_interpolation_points: int = 2
    undo_limit: int = 100
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        """Validate values."""
        if len(self.initial_rgb) != 3:
            raise ValueError("initial_rgb must have 3 channels")
        self.initial_rgb = clamp_rgb(self.initial_rgb)

        if self.interpolation_steps < 2:
            raise ValueError(
                f"interpolation_steps must be >= 2, got {self.interpolation_steps}"
            )
        if self.min_interpolation_points < 2:
            raise ValueError(
                f"min_interpolation_points must be >= 2, got {self.min_interpolation_points}"
            )
        if self.undo_limit < 1:
            raise ValueError(f"undo_limit must be >= 1, got {self.undo_limit}")

        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level}")

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        data = asdict(self)
        data["initial_rgb"] = list(self.initial_rgb)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EditorConfig:
        """Deserialize from dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        kwargs = {k: v for k, v in data.items() if k in known}
        if "initial_rgb" in kwargs:
            kwargs["initial_rgb"] = tuple(kwargs["initial_rgb"])
        return cls(**kwargs)

    def save(self, path: str | Path) -> None:
        """
        Save configuration to a JSON file.

        Args:
            path: File path to save to
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path: str | Path) -> EditorConfig:
        """Load configuration from a JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        return cls.from_dict(data)
