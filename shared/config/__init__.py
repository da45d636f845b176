"""Shared configuration"""
from .settings import (
    ConfigSnapshot,
    freeze_config,
    load_config_from_env,
    get_provider_section,
    get_active_provider,
)
from .logger_config import get_logger, logger

__all__ = [
    'ConfigSnapshot',
    'freeze_config',
    'load_config_from_env',
    'get_provider_section',
    'get_active_provider',
    'get_logger',
    'logger'
]
