"""Infrastructure layer configuration management."""
from .config_loader import (
    ConfigLoader, LoggingConfig, PersistenceConfig, TrainingSettings,
)
from .log_setup import configure_logging

__all__ = [
    'ConfigLoader',
    'LoggingConfig',
    'PersistenceConfig',
    'TrainingSettings',
    'configure_logging'
]
