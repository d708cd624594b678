"""
Parser configuration and reference clock.
"""

from .settings import ParserConfig, build_config, config_from_env, load_config, reference_today

__all__ = ["ParserConfig", "build_config", "config_from_env", "load_config", "reference_today"]
