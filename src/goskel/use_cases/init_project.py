"""Use Case: Apply an InitConfig to the template checkout."""

from pathlib import Path
from typing import Optional

from goskel.domain.config import InitDefaults
from goskel.domain.constants import MAIN_GO_TEMPLATE, MAKEFILE_TEMPLATE, SKELETON_DIRECTORIES
from goskel.domain.entities import InitConfig, InitOutcome
from goskel.domain.protocols import CommandRunnerProtocol, FileSystemProtocol, TelemetryPort


class InitProjectUseCase:
    """
    Orchestrate project initialization.

    Steps run strictly in order. Only ``go mod init`` is fatal; every other
    failure is reported and the next step still runs. Nothing is rolled back.
    """

    def __init__(
        self,
        runner: CommandRunnerProtocol,
        filesystem: FileSystemProtocol,
        telemetry: TelemetryPort,
        defaults: InitDefaults,
    ) -> None:
        self.runner = runner
        self.filesystem = filesystem
        self.telemetry = telemetry
        self.defaults = defaults

    def execute(self, config: InitConfig, project_root: Path) -> InitOutcome:
        """Initialize the project rooted at ``project_root``."""
        failed: list[str] = []
        root = project_root
        segment = config.module_segment
        entry_point = self.defaults.entry_point(segment)

        # 1. Module identity; everything else depends on it.
        if not self._init_module(config.module_name, root):
            return InitOutcome(project_root=root, aborted=True)

        # 2-3. Skeleton and entry point
        if not self._create_skeleton(root, segment):
            failed.append("directories")
        if not self._write_entry_point(root, entry_point):
            failed.append("entry-point")

        # 4. Directory rename; later steps follow the new location.
        if config.rename_directory and config.directory_name != root.name:
            renamed = self._rename_directory(root, config.directory_name)
            if renamed is None:
                failed.append("rename")
            else:
                root = renamed

        # 5. Taskfile
        if config.init_task and not self._init_taskfile(root):
            failed.append("taskfile")

        # 6. Makefile
        if config.init_make and not self._write_makefile(root, entry_point):
            failed.append("makefile")

        # 7. Version control
        if config.reinit_vcs:
            failed.extend(self._reinit_vcs(root, config.remote_url))

        # 8. Bootstrap file
        if config.remove_bootstrap and not self._remove_bootstrap(root):
            failed.append("remove-bootstrap")

        # 9. Guidance
        self._print_guidance(entry_point, root if root != project_root else None)
        return InitOutcome(project_root=root, failed_steps=failed)

    def _init_module(self, module_name: str, root: Path) -> bool:
        args = ["mod", "init", module_name]
        self.telemetry.step("Initializing go module...")
        self.telemetry.step(f"{self.defaults.module_tool} {' '.join(args)}")
        result = self.runner.execute(self.defaults.module_tool, args, cwd=str(root))
        if not result.ok:
            self.telemetry.error(f"Error initializing go module: {result.describe()}")
            return False
        self.telemetry.step("Done")
        return True

    def _create_skeleton(self, root: Path, segment: str) -> bool:
        self.telemetry.step("Initializing directory structure...")
        try:
            self.filesystem.make_dirs(self.filesystem.join_path(str(root), "cmd", segment))
            for name in SKELETON_DIRECTORIES:
                self.filesystem.make_dirs(self.filesystem.join_path(str(root), name))
        except OSError as e:
            self.telemetry.error(f"Error creating directory structure: {e}")
            return False
        self.telemetry.step("Done")
        return True

    def _write_entry_point(self, root: Path, entry_point: str) -> bool:
        self.telemetry.step(f"Creating {self.defaults.entry_file}...")
        try:
            self.filesystem.write_text(
                self.filesystem.join_path(str(root), entry_point), MAIN_GO_TEMPLATE)
        except OSError as e:
            self.telemetry.error(f"Error creating {entry_point}: {e}")
            return False
        self.telemetry.step("Done")
        return True

    def _rename_directory(self, root: Path, directory_name: str) -> Optional[Path]:
        target = root.parent / directory_name
        self.telemetry.step(f"Renaming directory to {directory_name}...")
        try:
            renamed = Path(self.filesystem.rename(str(root), str(target)))
        except OSError as e:
            self.telemetry.error(f"Error renaming current directory: {e}")
            return None
        self.telemetry.step("Done")
        return renamed

    def _init_taskfile(self, root: Path) -> bool:
        self.telemetry.step("Initializing taskfile...")
        result = self.runner.execute(self.defaults.task_runner, ["--init"], cwd=str(root))
        if not result.ok:
            self.telemetry.error(f"Error initializing taskfile: {result.describe()}")
            return False
        self.telemetry.step("Done")
        return True

    def _write_makefile(self, root: Path, entry_point: str) -> bool:
        self.telemetry.step("Initializing makefile...")
        try:
            self.filesystem.write_text(
                self.filesystem.join_path(str(root), self.defaults.makefile),
                MAKEFILE_TEMPLATE.format(entry_point=entry_point),
            )
        except OSError as e:
            self.telemetry.error(f"Error creating {self.defaults.makefile}: {e}")
            return False
        self.telemetry.step("Done")
        return True

    def _reinit_vcs(self, root: Path, remote_url: Optional[str]) -> list[str]:
        """git init, then point origin at the remote. Returns failed step names."""
        failed: list[str] = []
        git = self.defaults.vcs_tool
        # A template checkout already has an origin to update.
        had_repository = self.filesystem.exists(self.filesystem.join_path(str(root), ".git"))

        self.telemetry.step("Reinitializing git...")
        result = self.runner.execute(git, ["init"], cwd=str(root))
        if result.ok:
            self.telemetry.step("Done")
        else:
            self.telemetry.error(f"Error reinitializing git: {result.describe()}")
            failed.append("git-init")

        if remote_url:
            verb = "set-url" if had_repository else "add"
            args = ["remote", verb, "origin", remote_url]
            self.telemetry.step("Configuring git...")
            self.telemetry.step(f"{git} {' '.join(args)}")
            result = self.runner.execute(git, args, cwd=str(root))
            if result.ok:
                self.telemetry.step("Done")
            else:
                self.telemetry.error(f"Error configuring git: {result.describe()}")
                failed.append("git-remote")
        return failed

    def _remove_bootstrap(self, root: Path) -> bool:
        name = self.defaults.bootstrap_file
        self.telemetry.step(f"Removing {name}...")
        try:
            if not self.filesystem.remove_file(self.filesystem.join_path(str(root), name)):
                self.telemetry.debug(f"{name} already absent")
        except OSError as e:
            self.telemetry.error(f"Error removing {name}: {e}")
            return False
        self.telemetry.step("Done")
        return True

    def _print_guidance(self, entry_point: str, renamed_root: Optional[Path]) -> None:
        self.telemetry.step("Initialization finished!")
        if renamed_root is not None:
            self.telemetry.step(f"Your project now lives in {renamed_root}")
        self.telemetry.step(
            f"You can now run '{self.defaults.module_tool} run ./{entry_point}' to run your program")
        self.telemetry.step(
            f"Or you can run '{self.defaults.module_tool} build ./{entry_point}' to build your program")
