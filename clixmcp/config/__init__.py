"""Configuration module for clixmcp."""

from clixmcp.config.loader import get_config_path, load_config
from clixmcp.config.schema import Config

__all__ = ["Config", "load_config", "get_config_path"]
