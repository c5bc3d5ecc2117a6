from typing import TYPE_CHECKING, Any, Optional, cast

from goskel.domain.config import InitDefaults
from goskel.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from goskel.infrastructure.gateways.process_gateway import SubprocessCommandRunner
from goskel.infrastructure.services.environment_prober import EnvironmentProber
from goskel.interface.prompter import ConsolePrompter
from goskel.interface.telemetry import ProjectTelemetry

if TYPE_CHECKING:
    from goskel.domain.protocols import (
        CommandRunnerProtocol,
        EnvironmentProberProtocol,
        FileSystemProtocol,
        PrompterProtocol,
        TelemetryPort,
    )


class GoskelContainer:
    """Dependency Injection Container for the template initializer."""

    def __init__(self, defaults: Optional[InitDefaults] = None) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults(defaults or InitDefaults())

    def _register_defaults(self, defaults: InitDefaults) -> None:
        """Register default implementations for protocols."""
        self.register_singleton("InitDefaults", defaults)
        self.register_singleton(
            "TelemetryPort", ProjectTelemetry("GOSKEL", "cyan", "Template initializer ready"))
        runner = SubprocessCommandRunner()
        self.register_singleton("CommandRunner", runner)
        self.register_singleton("FileSystemGateway", FileSystemGateway())
        self.register_singleton("Prompter", ConsolePrompter())
        self.register_singleton("EnvironmentProber", EnvironmentProber(runner, defaults))

    # The container holds heterogeneous services.
    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_defaults(self) -> InitDefaults:
        """Return the tool and file name defaults."""
        return cast(InitDefaults, self.get("InitDefaults"))

    def get_telemetry_port(self) -> "TelemetryPort":
        """Return the telemetry/UI port."""
        return cast("TelemetryPort", self.get("TelemetryPort"))

    def get_command_runner(self) -> "CommandRunnerProtocol":
        """Return the external process runner."""
        return cast("CommandRunnerProtocol", self.get("CommandRunner"))

    def get_filesystem_gateway(self) -> "FileSystemProtocol":
        """Return the filesystem gateway."""
        return cast("FileSystemProtocol", self.get("FileSystemGateway"))

    def get_prompter(self) -> "PrompterProtocol":
        """Return the console prompter."""
        return cast("PrompterProtocol", self.get("Prompter"))

    def get_environment_prober(self) -> "EnvironmentProberProtocol":
        """Return the tool prober."""
        return cast("EnvironmentProberProtocol", self.get("EnvironmentProber"))

