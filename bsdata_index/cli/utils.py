"""Shared utilities for CLI commands."""

from pathlib import Path


def load_data_files(source_dir: Path) -> dict[str, bytes]:
    """Load every regular file under a directory.

    Hidden files and anything inside hidden directories (such as `.git`)
    are ignored. Keys are paths relative to `source_dir` using `/`.

    Args:
        source_dir: Repository snapshot directory

    Returns:
        Relative file path to file contents

    Raises:
        FileNotFoundError: If the directory doesn't exist
        ValueError: If no files are found
    """
    if not source_dir.is_dir():
        raise FileNotFoundError(f"Source directory not found: {source_dir}")

    data_files: dict[str, bytes] = {}
    for path in sorted(source_dir.rglob("*")):
        relative = path.relative_to(source_dir)
        if any(part.startswith(".") for part in relative.parts):
            continue
        if path.is_file():
            data_files[relative.as_posix()] = path.read_bytes()

    if not data_files:
        raise ValueError(f"No data files found in: {source_dir}")

    return data_files


def write_repository_files(files: dict[str, bytes], output_dir: Path) -> list[Path]:
    """Write compressed repository files to a directory.

    Args:
        files: Compressed file name to contents
        output_dir: Directory to write into (created if missing)

    Returns:
        Paths of the written files

    Raises:
        OSError: If a file write fails
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for file_name in sorted(files):
        file_path = output_dir / file_name
        try:
            file_path.write_bytes(files[file_name])
        except OSError as e:
            raise OSError(f"Failed to write file {file_path}: {e}") from e
        written.append(file_path)
    return written
