"""Package resolution core for multi-ecosystem monorepo releases."""

__version__ = "0.1.0"
