"""Configuration management for gvt."""

from .types import GvtConfig, MessageConfig
from .loader import ConfigLoader

__all__ = [
    "GvtConfig",
    "MessageConfig",
    "ConfigLoader",
]
