"""Pydantic configuration models for the wellness tracker."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator


class PathsConfig(BaseModel):
    """File paths configuration."""

    entries_file: Path = Path("~/wellness/entries.json")
    log_file: Path = Path("~/wellness/wellness.log")

    @model_validator(mode="after")
    def expand_paths(self):
        """Expand ~ in all paths."""
        self.entries_file = self.entries_file.expanduser()
        self.log_file = self.log_file.expanduser()
        return self


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    json_mode: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        v_upper = v.upper()
        if v_upper not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {VALID_LOG_LEVELS}")
        return v_upper


class AnalysisConfig(BaseModel):
    """Tunables for trends and recommendations."""

    recent_window: int = 10
    recent_display: int = 6
    trend_threshold: float = 0.1

    @field_validator("recent_window")
    @classmethod
    def validate_window(cls, v: int) -> int:
        if not 1 <= v <= 10:
            raise ValueError(f"recent_window must be 1-10, got {v}")
        return v

    @field_validator("recent_display")
    @classmethod
    def validate_display(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"recent_display must be positive, got {v}")
        return v


class WellnessConfig(BaseModel):
    """Main configuration model."""

    paths: PathsConfig = Field(default_factory=PathsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)

    @classmethod
    def from_dict(cls, data: dict) -> "WellnessConfig":
        """Create config from a parsed YAML dict."""
        if "paths" in data and isinstance(data["paths"], dict):
            for key in ["entries_file", "log_file"]:
                if isinstance(data["paths"].get(key), str):
                    data["paths"][key] = Path(data["paths"][key])

        return cls.model_validate(data)

    def to_dict(self) -> dict:
        return self.model_dump(mode="python")

    def to_yaml_dict(self) -> dict:
        """Plain-types dict suitable for yaml.safe_dump."""
        return self.model_dump(mode="json")
