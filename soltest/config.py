"""Configuration for soltest, loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass

COLOR_MODES = ("auto", "always", "never")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    data_dir_name: str = "data"
    color: str = "auto"  # "auto", "always" or "never"
    log_level: str = "WARNING"
    cc: str = "gcc"
    cxx: str = "g++"

    def __post_init__(self) -> None:
        if self.color not in COLOR_MODES:
            raise ValueError(f"invalid color mode {self.color!r} (choose from {', '.join(COLOR_MODES)})")
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"invalid log level {self.log_level!r}")
        if not self.data_dir_name or os.sep in self.data_dir_name:
            raise ValueError(f"invalid data directory name {self.data_dir_name!r}")

    @classmethod
    def from_env(cls, **overrides) -> Config:
        kwargs: dict = {}
        env_map: dict[str, str] = {
            "SOLTEST_DATA_DIR": "data_dir_name",
            "SOLTEST_COLOR": "color",
            "SOLTEST_LOG_LEVEL": "log_level",
            "CC": "cc",
            "CXX": "cxx",
        }
        for env_var, field_name in env_map.items():
            val = os.environ.get(env_var)
            if val:
                kwargs[field_name] = val
        # NO_COLOR (https://no-color.org) disables colour unless forced
        if os.environ.get("NO_COLOR"):
            kwargs.setdefault("color", "never")
        kwargs.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**kwargs)
