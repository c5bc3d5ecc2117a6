"""Detect which optional external tools are installed."""

from goskel.domain.config import InitDefaults
from goskel.domain.entities import EnvironmentInfo
from goskel.domain.protocols import CommandRunnerProtocol, EnvironmentProberProtocol


class EnvironmentProber(EnvironmentProberProtocol):
    """Resolves each configured tool name on the search path. Pure query."""

    def __init__(self, runner: CommandRunnerProtocol, defaults: InitDefaults) -> None:
        self._runner = runner
        self._defaults = defaults

    def probe(self) -> EnvironmentInfo:
        return EnvironmentInfo(
            module_tool=self._installed(self._defaults.module_tool),
            task_runner=self._installed(self._defaults.task_runner),
            make_tool=self._installed(self._defaults.make_tool),
            vcs_tool=self._installed(self._defaults.vcs_tool),
        )

    def _installed(self, name: str) -> bool:
        return self._runner.which(name) is not None
