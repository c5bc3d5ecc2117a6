from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class EnvironmentInfo:
    """Which optional external tools resolve on the current PATH."""

    module_tool: bool = False
    task_runner: bool = False
    make_tool: bool = False
    vcs_tool: bool = False


@dataclass(frozen=True)
class RemoteInfo:
    """Parsed answer to the repository question.

    ``url`` is what gets registered as ``origin``; ``module_path`` is the
    default Go module name derived from it.
    """

    url: str
    module_path: str


@dataclass(frozen=True)
class InitConfig:
    """Resolved user choices. Built once by the configurator, read once by the applier."""

    module_name: str
    directory_name: str
    remote_url: Optional[str] = None
    rename_directory: bool = False
    init_task: bool = True
    init_make: bool = True
    reinit_vcs: bool = True
    remove_bootstrap: bool = True

    def __post_init__(self) -> None:
        if not self.module_name:
            raise ValueError("module_name must not be empty")

    @property
    def module_segment(self) -> str:
        """Last path segment of the module name (``example.com/foo`` -> ``foo``)."""
        return module_segment(self.module_name)


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one external process invocation."""

    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    def describe(self) -> str:
        """Short diagnostic for logs: stderr if any, else the exit status."""
        detail = self.stderr.strip() or self.stdout.strip()
        if detail:
            return f"exit status {self.returncode}: {detail}"
        return f"exit status {self.returncode}"


@dataclass(frozen=True)
class InitOutcome:
    """What the applier did. ``aborted`` is set only when module init failed."""

    project_root: Path
    aborted: bool = False
    failed_steps: list[str] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return not self.aborted and not self.failed_steps


def module_segment(module_name: str) -> str:
    """Return the final ``/``-separated segment of a module path."""
    return module_name.rstrip("/").rsplit("/", 1)[-1]
