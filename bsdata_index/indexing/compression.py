"""Zip compression of data files and compressed-name normalization."""

import io
import zipfile
import zlib

from bsdata_index.common.constants import ZIP_ENTRY_DATE_TIME
from bsdata_index.indexing.filename_utils import (
    get_compressed_file_name,
    get_file_name,
    get_uncompressed_file_name,
    is_compressed_path,
)
from bsdata_index.utils.exceptions import CompressionError
from bsdata_index.utils.logger import get_logger

logger = get_logger(__name__)


def compress_data(file_name: str, data: bytes) -> bytes:
    """Compress data into a single-entry zip archive.

    The entry is named after the uncompressed base name of `file_name` and
    carries a fixed timestamp, so the same input always gives the same bytes.

    Args:
        file_name: Name (or path) of the file being compressed
        data: Raw file contents

    Returns:
        Zip archive bytes

    Raises:
        CompressionError: If the archive cannot be written
    """
    entry = zipfile.ZipInfo(get_uncompressed_file_name(file_name), date_time=ZIP_ENTRY_DATE_TIME)
    entry.compress_type = zipfile.ZIP_DEFLATED
    entry.external_attr = 0o644 << 16

    buffer = io.BytesIO()
    try:
        with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as zf:
            zf.writestr(entry, data)
    except (OSError, ValueError, zipfile.LargeZipFile) as e:
        raise CompressionError(f"Failed to compress {file_name}: {e}") from e
    return buffer.getvalue()


def decompress_data(data: bytes) -> bytes:
    """Read the first file entry of a zip archive.

    Args:
        data: Zip archive bytes

    Returns:
        Contents of the first non-directory entry

    Raises:
        CompressionError: If the archive is corrupt or has no file entry
    """
    try:
        with zipfile.ZipFile(io.BytesIO(data), "r") as zf:
            for info in zf.infolist():
                if info.is_dir():
                    continue
                return zf.read(info)
    except (zipfile.BadZipFile, zlib.error, OSError, EOFError, RuntimeError, ValueError) as e:
        raise CompressionError(f"Corrupt or invalid zip archive: {e}") from e

    raise CompressionError("Zip archive contains no file entries")


def normalize_repository_data(data_files: dict[str, bytes]) -> dict[str, bytes]:
    """Ensure every file has a compressed name and compressed contents.

    Files whose names already carry a compressed suffix are assumed to hold a
    valid archive: only their directory components are dropped. Everything
    else is compressed and renamed. Applying this to its own output changes
    nothing.

    Input names are processed in sorted order; when two inputs map to the
    same compressed name the later one wins and a warning is logged.

    Args:
        data_files: File name (or path) to file contents

    Returns:
        Compressed file name to compressed contents

    Raises:
        CompressionError: If a file cannot be compressed
    """
    compressed_files: dict[str, bytes] = {}
    sources: dict[str, str] = {}

    for file_name in sorted(data_files):
        data = data_files[file_name]
        if is_compressed_path(file_name):
            compressed_name = get_file_name(file_name)
            compressed_data = data
        else:
            compressed_name = get_compressed_file_name(file_name)
            compressed_data = compress_data(file_name, data)

        if compressed_name in compressed_files:
            logger.warning(
                "file_name_collision",
                file_name=compressed_name,
                replaced=sources[compressed_name],
                source=file_name,
            )
        compressed_files[compressed_name] = compressed_data
        sources[compressed_name] = file_name

    return compressed_files
