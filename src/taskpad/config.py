"""Configuration models for taskpad."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from taskpad.formatting import DEFAULT_DATE_FORMAT


class DisplayConfig(BaseModel):
    """Configuration for console rendering."""

    date_format: str = DEFAULT_DATE_FORMAT
    banner_width: int = Field(default=40, ge=1)
    divider_width: int = Field(default=50, ge=1)
    section_width: int = Field(default=20, ge=1)
    item_width: int = Field(default=30, ge=1)


class TaskpadConfig(BaseModel):
    """Main configuration for taskpad."""

    app_name: str = "Task Manager"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    @classmethod
    def load(cls, path: Path | None = None) -> TaskpadConfig:
        """Load configuration from file or return defaults.

        Nothing is read unless a path is given explicitly.
        """
        if path is None or not path.exists():
            return cls()

        with open(path, encoding="utf-8") as f:
            data = json.load(f)

        return cls.model_validate(data)

    def save(self, path: Path) -> None:
        """Save configuration to file."""
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.model_dump(), f, indent=2)
