"""
Settings for tokenizers and sentence splitters.

Pydantic models plus helpers that validate YAML text or plain mappings.
"""

from .loader import ConfigLoadError, load_config_from_mapping, load_config_from_string
from .schema import SplitterConfig, TokenizerConfig

__all__ = ['ConfigLoadError', 'SplitterConfig', 'TokenizerConfig',
           'load_config_from_mapping', 'load_config_from_string']
