from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from goskel.domain.entities import CommandResult, EnvironmentInfo


class TelemetryPort(Protocol):
    """Protocol for user-facing progress output."""

    def step(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def debug(self, message: str) -> None: ...
    def handshake(self) -> None: ...


class CommandRunnerProtocol(Protocol):
    """Capability interface over external tool invocation. Tests substitute a fake."""

    def execute(self, name: str, args: list[str], cwd: Optional[str] = None) -> "CommandResult":
        """Run ``name`` with ``args`` and block until it exits. Never raises for tool failures."""
        ...

    def which(self, name: str) -> Optional[str]:
        """Resolve an executable on the search path, or None."""
        ...


class FileSystemProtocol(Protocol):
    """Protocol for the filesystem side effects of initialization."""

    def make_dirs(self, path: str, exist_ok: bool = True) -> None:
        """Create directory and parent directories if needed."""
        ...

    def write_text(self, path: str, content: str, encoding: str = "utf-8") -> None:
        """Write text content to a file, replacing it."""
        ...

    def exists(self, path: str) -> bool:
        """Return whether path exists."""
        ...

    def remove_file(self, path: str) -> bool:
        """Delete a file. Returns False if it was already absent."""
        ...

    def rename(self, source: str, target: str) -> str:
        """Rename source to target and return the resolved target."""
        ...

    def join_path(self, *paths: str) -> str:
        """Join path components into a single path string."""
        ...


class PrompterProtocol(Protocol):
    """One printed question, one line read back."""

    def ask(self, question: str) -> str:
        """Print the question and return the stripped answer ('' on end of input)."""
        ...

    def yes_no(self, question: str, default: bool) -> bool:
        """Ask a y/n question and parse the answer against ``default``."""
        ...


class EnvironmentProberProtocol(Protocol):
    """Protocol for detecting optional external tools."""

    def probe(self) -> "EnvironmentInfo":
        ...
