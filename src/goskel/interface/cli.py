"""CLI entry points for goskel - Thin Controller using Typer."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from goskel.domain.config import InitDefaults
from goskel.domain.constants import GOSKEL_BANNER
from goskel.domain.protocols import (
    CommandRunnerProtocol,
    EnvironmentProberProtocol,
    FileSystemProtocol,
    PrompterProtocol,
    TelemetryPort,
)
from goskel.interface.telemetry import configure_logging
from goskel.use_cases.configure_project import ConfigureProjectUseCase
from goskel.use_cases.init_project import InitProjectUseCase

# B008: avoid function call in default; use module-level singletons for Typer Options
_PROJECT_ROOT_OPTION = typer.Option(
    None, "--project-root", "-C", help="Template checkout to initialize (default: current directory)")
_BOOTSTRAP_FILE_OPTION = typer.Option(
    None, "--bootstrap-file", help="Bootstrap file to offer for removal (default: init.go)")


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    telemetry: TelemetryPort
    runner: CommandRunnerProtocol
    filesystem: FileSystemProtocol
    prompter: PrompterProtocol
    prober: EnvironmentProberProtocol
    defaults: InitDefaults


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def resolve_project_root(path: Optional[Path]) -> Path:
        """Explicit path if given, else the current directory; always absolute."""
        return (path or Path.cwd()).resolve()

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="goskel",
            help=f"{GOSKEL_BANNER}\ngoskel: turn the Go web template into your own project",
            add_completion=False,
        )

        @app.command(name="init")
        def init_project(
            project_root: Optional[Path] = _PROJECT_ROOT_OPTION,
            bootstrap_file: Optional[str] = _BOOTSTRAP_FILE_OPTION,
            verbose: bool = typer.Option(
                False, "--verbose", "-v", help="Log every command and its exit status"),
        ) -> None:
            """Ask a few questions, then initialize the project."""
            configure_logging(verbose)
            deps.telemetry.handshake()
            root = CLIAppFactory.resolve_project_root(project_root)
            defaults = deps.defaults.with_overrides(bootstrap_file=bootstrap_file)

            env = deps.prober.probe()
            deps.telemetry.debug(f"Environment: {env}")
            if not env.module_tool:
                deps.telemetry.error(f"{defaults.module_tool} is not installed")
                raise typer.Exit(code=1)

            config = ConfigureProjectUseCase(
                prompter=deps.prompter,
                runner=deps.runner,
                telemetry=deps.telemetry,
                defaults=defaults,
            ).execute(env, root)
            outcome = InitProjectUseCase(
                runner=deps.runner,
                filesystem=deps.filesystem,
                telemetry=deps.telemetry,
                defaults=defaults,
            ).execute(config, root)

            if outcome.aborted:
                raise typer.Exit(code=1)
            if outcome.failed_steps:
                deps.telemetry.warning(
                    "Some steps failed and were skipped: " + ", ".join(outcome.failed_steps))

        @app.command(name="env")
        def show_env() -> None:
            """Show which external tools were found on PATH."""
            env = deps.prober.probe()
            rows = [
                (deps.defaults.module_tool, "module tool (required)", env.module_tool),
                (deps.defaults.task_runner, "task runner", env.task_runner),
                (deps.defaults.make_tool, "make tool", env.make_tool),
                (deps.defaults.vcs_tool, "version control", env.vcs_tool),
            ]
            table = Table(title="Detected tools", header_style="bold cyan")
            table.add_column("Tool")
            table.add_column("Role")
            table.add_column("Installed")
            for name, role, present in rows:
                table.add_row(name, role, "yes" if present else "no")
            Console().print(table)

        return app
