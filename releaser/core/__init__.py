"""Core domain types: results, errors and configuration."""

from .config import Config, ConfigError, RepoConfig, TemplatesConfig, load_config
from .errors import ErrorCode, ReleaseError, exit_code_for
from .result import Err, Ok, Result

__all__ = [
    # config
    "Config",
    "ConfigError",
    "RepoConfig",
    "TemplatesConfig",
    "load_config",
    # errors
    "ErrorCode",
    "ReleaseError",
    "exit_code_for",
    # result
    "Err",
    "Ok",
    "Result",
]
