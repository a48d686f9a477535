"""repofetch exception classes."""

from pathlib import Path


class RepofetchError(Exception):
    """Base exception for all repofetch errors.

    ``fatal`` errors abort the whole summary; the others are recovered into
    sentinel values by the summary service.
    """

    fatal = True

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(message)


class NotARepositoryError(RepofetchError):
    """Raised when the path is not inside a git repository."""

    def __init__(self, path: Path | str) -> None:
        super().__init__("NOT_A_REPOSITORY", f"{path} is not a git repository")


class BareRepositoryError(RepofetchError):
    """Raised when the repository has no working tree."""

    def __init__(self, path: Path | str) -> None:
        super().__init__("BARE_REPOSITORY", f"{path} is a bare repository (no working tree)")


class NoSourceCodeFoundError(RepofetchError):
    def __init__(self, path: Path | str) -> None:
        super().__init__("NO_SOURCE_CODE", f"no source code found in {path}")


class ReferenceResolutionError(RepofetchError):
    def __init__(self, message: str = "unable to resolve the current commit") -> None:
        super().__init__("REFERENCE_RESOLUTION_FAILED", message)


class ConfigurationUnavailableError(RepofetchError):
    def __init__(self, message: str = "unable to read the repository configuration") -> None:
        super().__init__("CONFIGURATION_UNAVAILABLE", message)


class DirectoryUnreadableError(RepofetchError):
    fatal = False

    def __init__(self, path: Path | str) -> None:
        super().__init__("DIRECTORY_UNREADABLE", f"unable to read directory {path}")


class GitCommandError(RepofetchError):
    """Raised when a git command exits non-zero, times out or cannot start."""

    fatal = False

    def __init__(self, command: list[str], returncode: int | None, stderr: str = "") -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        detail = stderr.strip() or "git command failed"
        super().__init__("GIT_COMMAND_FAILED", f"{' '.join(command)}: {detail}")
