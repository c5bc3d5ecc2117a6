"""Pure helpers that turn raw answers into module names, remotes and booleans."""

import re
from typing import Optional

from goskel.domain.constants import REMOTE_SCHEMES
from goskel.domain.entities import RemoteInfo

# git@github.com:user/repo.git
_SCP_REMOTE = re.compile(r"^[\w.-]+@(?P<host>[^:/]+):(?P<path>.+)$")


def parse_yes_no(answer: str, default: bool) -> bool:
    """Literal "y" is True, literal "n" is False, anything else is the default."""
    if answer == "y":
        return True
    if answer == "n":
        return False
    return default


def _strip_git_suffix(path: str) -> str:
    path = path.strip("/")
    if path.endswith(".git"):
        path = path[: -len(".git")]
    return path


def parse_remote(answer: str, directory_name: str) -> Optional[RemoteInfo]:
    """Interpret the repository answer.

    Accepts a full URL, an scp-style ``git@host:user/repo`` remote, a
    scheme-less ``host/user/repo`` path, or a ``host/user`` pair, in which
    case ``directory_name`` becomes the repository name.
    """
    answer = answer.strip()
    if not answer:
        return None

    for scheme in REMOTE_SCHEMES:
        if answer.startswith(scheme):
            path = answer[len(scheme):]
            host, _, rest = path.partition("/")
            # ssh://git@host/... carries a user part
            host = host.rsplit("@", 1)[-1]
            module_path = _strip_git_suffix(f"{host}/{rest}" if rest else host)
            return RemoteInfo(url=answer, module_path=module_path)

    match = _SCP_REMOTE.match(answer)
    if match:
        module_path = _strip_git_suffix(f"{match.group('host')}/{match.group('path')}")
        return RemoteInfo(url=answer, module_path=module_path)

    path = answer.strip("/")
    if path.count("/") == 1 and directory_name:
        path = f"{path}/{directory_name}"
    return RemoteInfo(url=f"https://{path}", module_path=_strip_git_suffix(path))


def default_module_name(remote: Optional[RemoteInfo], directory_name: str, fallback: str) -> str:
    """Remote module path if any, else the directory name, else ``fallback``."""
    if remote is not None and remote.module_path:
        return remote.module_path
    return directory_name or fallback
