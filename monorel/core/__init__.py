"""Core types shared by every layer."""

from .config import (
    Config,
    ConfigError,
    HookCommand,
    PackageConfig,
    ResolverConfig,
    ResolverKind,
    VersionMode,
    load_config,
)
from .errors import ErrorCode
from .result import Err, Ok, Result, is_err, is_ok

__all__ = [
    # config
    "Config",
    "ConfigError",
    "HookCommand",
    "PackageConfig",
    "ResolverConfig",
    "ResolverKind",
    "VersionMode",
    "load_config",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
    "is_err",
    "is_ok",
]
