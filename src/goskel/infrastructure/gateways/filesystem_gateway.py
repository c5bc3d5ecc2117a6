"""Filesystem Gateway - Infrastructure implementation of FileSystemProtocol."""

from pathlib import Path

from goskel.domain.protocols import FileSystemProtocol


class FileSystemGateway(FileSystemProtocol):
    """Infrastructure implementation of FileSystemProtocol using pathlib."""

    def make_dirs(self, path: str, exist_ok: bool = True) -> None:
        """Create directory and parent directories if needed."""
        Path(path).mkdir(parents=True, exist_ok=exist_ok)

    def write_text(self, path: str, content: str, encoding: str = "utf-8") -> None:
        """Write text content to a file."""
        Path(path).write_text(content, encoding=encoding)

    def exists(self, path: str) -> bool:
        """Check if path exists."""
        return Path(path).exists()

    def remove_file(self, path: str) -> bool:
        """Delete a file; a missing file is not an error."""
        target = Path(path)
        if not target.exists():
            return False
        target.unlink()
        return True

    def rename(self, source: str, target: str) -> str:
        """Rename a file or directory. Refuses to replace an existing target."""
        target_path = Path(target)
        if target_path.exists():
            raise FileExistsError(f"{target} already exists")
        return str(Path(source).rename(target_path).resolve())

    def join_path(self, *paths: str) -> str:
        """Join path components into a single path string."""
        return str(Path(*paths))
