"""Line-oriented console prompts."""

from typing import Callable

from goskel.domain.naming import parse_yes_no
from goskel.domain.protocols import PrompterProtocol


class ConsolePrompter(PrompterProtocol):
    """Prints one question line and reads one answer line."""

    def __init__(
        self,
        output: Callable[[str], None] = print,
        read_line: Callable[[], str] = input,
    ) -> None:
        self._output = output
        self._read_line = read_line

    def ask(self, question: str) -> str:
        self._output(question)
        try:
            return self._read_line().strip()
        except EOFError:
            return ""

    def yes_no(self, question: str, default: bool) -> bool:
        suffix = "(default: y)" if default else "(default: n)"
        return parse_yes_no(self.ask(f"{question} (y/n) {suffix}"), default)
