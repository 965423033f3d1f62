"""Modulo configurazione."""

from .settings import Config, FilesConfig, LoggingConfig

__all__ = ["Config", "FilesConfig", "LoggingConfig"]
