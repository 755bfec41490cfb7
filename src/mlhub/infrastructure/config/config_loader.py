"""Configuration management infrastructure - Type-safe YAML configuration loading."""
import logging
from pathlib import Path
from typing import Any, Dict, List, Literal

import yaml
from pydantic import BaseModel, Field, field_validator

from mlhub.application.status import DEFAULT_DONE_STATUSES, TRAINING_STATUS_SCHEDULING

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class LoggingConfig(BaseModel):
    """Logging configuration with validation."""
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

    class Config:
        """Pydantic configuration."""
        validate_assignment = True

    @field_validator("level")
    @classmethod
    def _check_level(cls, v: str) -> str:
        v = v.upper()
        if v not in _LOG_LEVELS:
            raise ValueError(f"level must be one of: {', '.join(sorted(_LOG_LEVELS))}")
        return v

    @property
    def numeric_level(self) -> int:
        return getattr(logging, self.level)


class TrainingSettings(BaseModel):
    """Job status rules applied when presenting trainings."""
    done_statuses: List[str] = Field(default_factory=lambda: list(DEFAULT_DONE_STATUSES))
    scheduling_status: str = TRAINING_STATUS_SCHEDULING

    class Config:
        """Pydantic configuration."""
        validate_assignment = True

    @field_validator("done_statuses")
    @classmethod
    def _check_done_statuses(cls, v: List[str]) -> List[str]:
        if not v or any(not s for s in v):
            raise ValueError("done_statuses must be a non-empty list of non-empty statuses")
        return v


class PersistenceConfig(BaseModel):
    """Storage backend selection."""
    backend: Literal["memory"] = "memory"

    class Config:
        """Pydantic configuration."""
        validate_assignment = True


class ConfigLoader:
    """YAML configuration loader with validation and type safety.

    Each section of the file is optional; a missing section yields the
    section's defaults.
    """

    def __init__(self, config_path: Path):
        """Initialize configuration loader.

        Args:
            config_path: Path to YAML configuration file
        """
        self.config_path = config_path

    def load_logging_config(self) -> LoggingConfig:
        """Load and validate logging configuration."""
        return LoggingConfig(**self._section('logging'))

    def load_training_settings(self) -> TrainingSettings:
        """Load and validate training status settings."""
        data = self._section('training')
        if 'done_statuses' in data and data['done_statuses'] is not None:
            data['done_statuses'] = [str(s) for s in data['done_statuses']]
        return TrainingSettings(**data)

    def load_persistence_config(self) -> PersistenceConfig:
        """Load and validate persistence configuration."""
        return PersistenceConfig(**self._section('persistence'))

    def load_all_configs(self) -> Dict[str, Any]:
        """Load all configurations at once."""
        return {
            'logging': self.load_logging_config(),
            'training': self.load_training_settings(),
            'persistence': self.load_persistence_config()
        }

    def _section(self, name: str) -> Dict[str, Any]:
        data = self._load_yaml().get(name) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Configuration section '{name}' must be a mapping")
        return dict(data)

    def _load_yaml(self) -> Dict[str, Any]:
        """Load raw YAML data with error handling."""
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in configuration file: {e}")

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError("Configuration file must contain a mapping")
        return data

    def validate_config_file(self) -> bool:
        """Validate that configuration file can be loaded and parsed."""
        try:
            self.load_all_configs()
            return True
        except Exception:
            return False

    def get_config_schema(self) -> Dict[str, Any]:
        """Get configuration schema for documentation."""
        return {
            'logging': LoggingConfig.model_json_schema(),
            'training': TrainingSettings.model_json_schema(),
            'persistence': PersistenceConfig.model_json_schema()
        }
