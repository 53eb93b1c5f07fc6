"""Configuration module."""

from bookreview.config.settings import AppSettings

__all__ = ["AppSettings"]
