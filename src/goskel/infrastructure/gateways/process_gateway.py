"""Process Gateway - runs external tools (go, task, git) through subprocess."""

import logging
import shutil
import subprocess
from typing import Optional

from goskel.domain.entities import CommandResult
from goskel.domain.protocols import CommandRunnerProtocol

logger = logging.getLogger("goskel.process")

# Shell convention for "command not found"
_NOT_FOUND = 127


class SubprocessCommandRunner(CommandRunnerProtocol):
    """Blocking subprocess runner. No timeout: a hung tool hangs the caller."""

    def execute(self, name: str, args: list[str], cwd: Optional[str] = None) -> CommandResult:
        """Run the command and capture its output."""
        command = [name, *args]
        logger.debug("exec %s (cwd=%s)", " ".join(command), cwd or ".")
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                check=False,
                cwd=cwd,
            )
        except OSError as e:
            return CommandResult(_NOT_FOUND, "", str(e))
        logger.debug("%s exited with %d", name, result.returncode)
        return CommandResult(result.returncode, result.stdout or "", result.stderr or "")

    def which(self, name: str) -> Optional[str]:
        """Resolve an executable on PATH."""
        return shutil.which(name)
