"""Utility modules for codebuild-env."""

from .config_manager import ConfigManager, load_environment_file

__all__ = ['ConfigManager', 'load_environment_file']
