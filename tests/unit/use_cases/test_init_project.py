"""Unit tests for InitProjectUseCase."""

from pathlib import Path
from unittest.mock import MagicMock

from goskel.domain.entities import CommandResult, InitConfig
from goskel.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from goskel.use_cases.init_project import InitProjectUseCase


def _template(tmp_path: Path, name: str = "gowebtemplate") -> Path:
    root = tmp_path / name
    root.mkdir()
    (root / "init.go").write_text("package main\n", encoding="utf-8")
    return root


def _config(**overrides: object) -> InitConfig:
    values: dict = {"module_name": "example.com/foo", "directory_name": "gowebtemplate"}
    values.update(overrides)
    return InitConfig(**values)


def _use_case(runner, telemetry, defaults, filesystem=None) -> InitProjectUseCase:
    return InitProjectUseCase(runner, filesystem or FileSystemGateway(), telemetry, defaults)


class TestInitProject:
    def test_full_run_creates_skeleton(self, tmp_path, fake_runner, telemetry, defaults) -> None:
        root = _template(tmp_path)
        outcome = _use_case(fake_runner, telemetry, defaults).execute(_config(), root)

        assert outcome.succeeded
        assert (root / "cmd" / "foo" / "main.go").read_text(encoding="utf-8").startswith("package main")
        assert 'fmt.Println("Hello, World!")' in (root / "cmd" / "foo" / "main.go").read_text(encoding="utf-8")
        assert (root / "pkg").is_dir()
        assert (root / "internal").is_dir()
        assert (root / "Makefile").read_text(encoding="utf-8") == "all:\n\tgo run ./cmd/foo/main.go\n"
        assert not (root / "init.go").exists()
        assert fake_runner.commands() == [
            ["go", "mod", "init", "example.com/foo"],
            ["task", "--init"],
            ["git", "init"],
        ]
        assert all(cwd == str(root) for _, _, cwd in fake_runner.calls)

    def test_guidance_references_entry_point(self, tmp_path, fake_runner, telemetry, defaults) -> None:
        root = _template(tmp_path)
        _use_case(fake_runner, telemetry, defaults).execute(_config(), root)

        telemetry.step.assert_any_call("Initialization finished!")
        telemetry.step.assert_any_call(
            "You can now run 'go run ./cmd/foo/main.go' to run your program")
        telemetry.step.assert_any_call(
            "Or you can run 'go build ./cmd/foo/main.go' to build your program")

    def test_module_init_failure_aborts_everything(self, tmp_path, make_runner, telemetry, defaults) -> None:
        root = _template(tmp_path)
        runner = make_runner(installed=set())
        outcome = _use_case(runner, telemetry, defaults).execute(_config(), root)

        assert outcome.aborted
        assert runner.commands() == [["go", "mod", "init", "example.com/foo"]]
        assert sorted(p.name for p in root.iterdir()) == ["init.go"]
        telemetry.error.assert_called_once()
        assert "Error initializing go module" in telemetry.error.call_args[0][0]

    def test_existing_directories_are_not_an_error(self, tmp_path, fake_runner, telemetry, defaults) -> None:
        root = _template(tmp_path)
        (root / "pkg").mkdir()
        (root / "cmd" / "foo").mkdir(parents=True)
        (root / "cmd" / "foo" / "main.go").write_text("old", encoding="utf-8")
        (root / "Makefile").write_text("old", encoding="utf-8")

        outcome = _use_case(fake_runner, telemetry, defaults).execute(_config(), root)

        assert outcome.succeeded
        assert (root / "cmd" / "foo" / "main.go").read_text(encoding="utf-8") != "old"
        assert (root / "Makefile").read_text(encoding="utf-8") != "old"

    def test_switches_off_skip_optional_steps(self, tmp_path, fake_runner, telemetry, defaults) -> None:
        root = _template(tmp_path)
        config = _config(init_task=False, init_make=False, reinit_vcs=False, remove_bootstrap=False)
        outcome = _use_case(fake_runner, telemetry, defaults).execute(config, root)

        assert outcome.succeeded
        assert fake_runner.commands() == [["go", "mod", "init", "example.com/foo"]]
        assert not (root / "Makefile").exists()
        assert (root / "init.go").exists()

    def test_missing_bootstrap_file_is_not_an_error(self, tmp_path, fake_runner, telemetry, defaults) -> None:
        root = _template(tmp_path)
        (root / "init.go").unlink()
        outcome = _use_case(fake_runner, telemetry, defaults).execute(_config(), root)

        assert outcome.succeeded
        telemetry.error.assert_not_called()

    def test_taskfile_failure_is_logged_and_run_continues(
        self, tmp_path, make_runner, telemetry, defaults
    ) -> None:
        root = _template(tmp_path)
        runner = make_runner(results={("task", "--init"): CommandResult(1, "", "no taskfile for you")})
        outcome = _use_case(runner, telemetry, defaults).execute(_config(), root)

        assert not outcome.aborted
        assert outcome.failed_steps == ["taskfile"]
        assert (root / "Makefile").exists()
        assert ["git", "init"] in runner.commands()
        assert not (root / "init.go").exists()


class TestRemoteWiring:
    def test_add_origin_for_fresh_repository(self, tmp_path, fake_runner, telemetry, defaults) -> None:
        root = _template(tmp_path)
        config = _config(remote_url="https://github.com/user/repo")
        _use_case(fake_runner, telemetry, defaults).execute(config, root)

        assert fake_runner.commands()[-1] == ["git", "remote", "add", "origin", "https://github.com/user/repo"]

    def test_set_url_when_template_checkout_has_git(self, tmp_path, fake_runner, telemetry, defaults) -> None:
        root = _template(tmp_path)
        (root / ".git").mkdir()
        config = _config(remote_url="https://github.com/user/repo")
        _use_case(fake_runner, telemetry, defaults).execute(config, root)

        assert fake_runner.commands()[-1] == ["git", "remote", "set-url", "origin", "https://github.com/user/repo"]

    def test_remote_failure_recorded(self, tmp_path, make_runner, telemetry, defaults) -> None:
        root = _template(tmp_path)
        runner = make_runner(results={("git", "remote"): CommandResult(2, "", "error: No such remote 'origin'")})
        config = _config(remote_url="https://github.com/user/repo")
        outcome = _use_case(runner, telemetry, defaults).execute(config, root)

        assert outcome.failed_steps == ["git-remote"]
        telemetry.error.assert_called_once()

    def test_no_remote_command_without_url(self, tmp_path, fake_runner, telemetry, defaults) -> None:
        root = _template(tmp_path)
        _use_case(fake_runner, telemetry, defaults).execute(_config(), root)
        assert not any(cmd[:2] == ["git", "remote"] for cmd in fake_runner.commands())


class TestDirectoryRename:
    def test_rename_moves_later_steps(self, tmp_path, fake_runner, telemetry, defaults) -> None:
        root = _template(tmp_path)
        config = _config(rename_directory=True, directory_name="foo")
        outcome = _use_case(fake_runner, telemetry, defaults).execute(config, root)

        renamed = tmp_path / "foo"
        assert outcome.project_root == renamed.resolve()
        assert not root.exists()
        assert (renamed / "cmd" / "foo" / "main.go").exists()
        assert (renamed / "Makefile").exists()
        assert not (renamed / "init.go").exists()
        task_cwd = [cwd for name, _, cwd in fake_runner.calls if name == "task"][0]
        assert task_cwd == str(renamed.resolve())

    def test_rename_declined_leaves_directory(self, tmp_path, fake_runner, telemetry, defaults) -> None:
        root = _template(tmp_path)
        outcome = _use_case(fake_runner, telemetry, defaults).execute(_config(), root)

        assert outcome.project_root == root
        assert root.exists()
        assert not (tmp_path / "foo").exists()

    def test_rename_failure_is_not_fatal(self, tmp_path, fake_runner, telemetry, defaults) -> None:
        root = _template(tmp_path)
        (tmp_path / "foo").mkdir()
        config = _config(rename_directory=True, directory_name="foo")
        outcome = _use_case(fake_runner, telemetry, defaults).execute(config, root)

        assert outcome.failed_steps == ["rename"]
        assert outcome.project_root == root
        assert (root / "Makefile").exists()


def test_filesystem_errors_are_reported(tmp_path, fake_runner, telemetry, defaults) -> None:
    root = _template(tmp_path)
    filesystem = MagicMock()
    filesystem.join_path.side_effect = lambda *parts: str(Path(*parts))
    filesystem.make_dirs.side_effect = PermissionError("read-only")
    filesystem.write_text.side_effect = PermissionError("read-only")
    filesystem.exists.return_value = False
    filesystem.remove_file.return_value = True

    outcome = _use_case(fake_runner, telemetry, defaults, filesystem).execute(_config(), root)

    assert outcome.failed_steps == ["directories", "entry-point", "makefile"]
    assert telemetry.error.call_count == 3
