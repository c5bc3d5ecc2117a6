"""Defaults for tool names and template file names."""

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class InitDefaults:
    """
    Names the initializer relies on.

    There is no configuration file: the CLI overrides individual fields via
    ``with_overrides`` and everything else keeps these values.
    """

    module_tool: str = "go"
    task_runner: str = "task"
    make_tool: str = "make"
    vcs_tool: str = "git"
    template_directory: str = "gowebtemplate"
    bootstrap_file: str = "init.go"
    entry_file: str = "main.go"
    makefile: str = "Makefile"

    def with_overrides(self, bootstrap_file: Optional[str] = None) -> "InitDefaults":
        """Return a copy with the given non-empty fields replaced."""
        if bootstrap_file:
            return replace(self, bootstrap_file=bootstrap_file)
        return self

    def entry_point(self, segment: str) -> str:
        """Relative path of the generated entry point for a module segment."""
        return f"cmd/{segment}/{self.entry_file}"
