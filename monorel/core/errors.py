"""Process exit codes for the monorel CLI."""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    The values are part of the CLI contract and should remain stable:
    - 0: Success
    - 1: User error (unknown package, invalid version argument)
    - 2: Config error (missing or invalid monorel.toml)
    - 3: Resolve error (manifest missing or unparsable, bad version, cycle)
    - 4: Publish error (a hook command failed)
    """

    OK = 0
    USER_ERROR = 1
    CONFIG_ERROR = 2
    RESOLVE_ERROR = 3
    PUBLISH_ERROR = 4

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")
