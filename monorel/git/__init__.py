"""Git operations used during version resolution."""

from monorel.git.tags import GitError, list_tags

__all__ = ["GitError", "list_tags"]
