"""Use Case: Ask the user how the template should be initialized."""

from pathlib import Path
from typing import Optional

from goskel.domain.config import InitDefaults
from goskel.domain.entities import EnvironmentInfo, InitConfig, RemoteInfo, module_segment
from goskel.domain.naming import default_module_name, parse_remote
from goskel.domain.protocols import CommandRunnerProtocol, PrompterProtocol, TelemetryPort


class ConfigureProjectUseCase:
    """Gather choices through a fixed question sequence; questions whose tool is missing are skipped."""

    def __init__(
        self,
        prompter: PrompterProtocol,
        runner: CommandRunnerProtocol,
        telemetry: TelemetryPort,
        defaults: InitDefaults,
    ) -> None:
        self.prompter = prompter
        self.runner = runner
        self.telemetry = telemetry
        self.defaults = defaults

    def execute(self, env: EnvironmentInfo, project_root: Path) -> InitConfig:
        """Run the questions in order and return the resolved configuration."""
        directory_name = project_root.name

        remote: Optional[RemoteInfo] = None
        if env.vcs_tool:
            remote = self._ask_remote(project_root, directory_name)

        module_default = default_module_name(
            remote, directory_name, self.defaults.template_directory)
        answer = self.prompter.ask(
            f"Your go module name? (default: {module_default})")
        module_name = answer or module_default

        rename_directory = False
        target_directory = self.defaults.template_directory
        if remote is None and self.prompter.yes_no(
                f"Do you want to rename directory to {module_segment(module_name)}?", False):
            rename_directory = True
            target_directory = module_segment(module_name)

        init_task = env.task_runner and self.prompter.yes_no(
            "Do you want to initialize a taskfile?", True)
        init_make = env.make_tool and self.prompter.yes_no(
            "Do you want to initialize a makefile?", True)
        reinit_vcs = env.vcs_tool and self.prompter.yes_no(
            "Do you want to reinitialize git?", True)
        remove_bootstrap = self.prompter.yes_no(
            f"Do you want to remove {self.defaults.bootstrap_file}?", True)

        config = InitConfig(
            module_name=module_name,
            directory_name=target_directory,
            remote_url=remote.url if (remote is not None and reinit_vcs) else None,
            rename_directory=rename_directory,
            init_task=init_task,
            init_make=init_make,
            reinit_vcs=reinit_vcs,
            remove_bootstrap=remove_bootstrap,
        )
        self.telemetry.debug(f"Resolved configuration: {config}")
        return config

    def _ask_remote(self, project_root: Path, directory_name: str) -> Optional[RemoteInfo]:
        username = self._suggest_username(project_root)
        owner = username or "<user>"
        answer = self.prompter.ask(
            "What's your git repository? "
            f"(e.g. https://github.com/{owner}/{directory_name or '<repo>'} or github.com/{owner}; "
            "empty for none)"
        )
        return parse_remote(answer, directory_name)

    def _suggest_username(self, project_root: Path) -> Optional[str]:
        """Read-only lookup of ``git config user.name``."""
        result = self.runner.execute(
            self.defaults.vcs_tool, ["config", "user.name"], cwd=str(project_root))
        if not result.ok:
            return None
        # Usernames with spaces are not usable as URL path segments.
        name = result.stdout.strip().replace(" ", "")
        return name or None
