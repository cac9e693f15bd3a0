"""Application configuration."""

from jaucp_scorer.config.settings import AppConfig, get_config

__all__ = ["AppConfig", "get_config"]
