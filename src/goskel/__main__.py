"""Package entry point - composition root. Wire dependencies and run the CLI app."""

from goskel.infrastructure.di.container import GoskelContainer
from goskel.interface.cli import CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    container = GoskelContainer()

    deps = CLIDependencies(
        telemetry=container.get_telemetry_port(),
        runner=container.get_command_runner(),
        filesystem=container.get_filesystem_gateway(),
        prompter=container.get_prompter(),
        prober=container.get_environment_prober(),
        defaults=container.get_defaults(),
    )

    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
