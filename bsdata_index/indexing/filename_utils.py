"""File name classification and compressed-name conventions."""

from bsdata_index.common.constants import (
    CATALOGUE_COMPRESSED_FILE_EXTENSION,
    CATALOGUE_FILE_EXTENSION,
    DEFAULT_INDEX_COMPRESSED_FILE_NAME,
    DEFAULT_INDEX_FILE_NAME,
    GAME_SYSTEM_COMPRESSED_FILE_EXTENSION,
    GAME_SYSTEM_FILE_EXTENSION,
    ROSTER_COMPRESSED_FILE_EXTENSION,
    ROSTER_FILE_EXTENSION,
    ZIP_FILE_EXTENSION,
)
from bsdata_index.indexing.models import DataType, FileClassification

# (raw suffix, compressed suffix, data type)
SUFFIX_PAIRS: list[tuple[str, str, DataType]] = [
    (GAME_SYSTEM_FILE_EXTENSION, GAME_SYSTEM_COMPRESSED_FILE_EXTENSION, DataType.GAME_SYSTEM),
    (CATALOGUE_FILE_EXTENSION, CATALOGUE_COMPRESSED_FILE_EXTENSION, DataType.CATALOGUE),
    (ROSTER_FILE_EXTENSION, ROSTER_COMPRESSED_FILE_EXTENSION, DataType.ROSTER),
]


def get_file_name(path: str) -> str:
    """Strip directory components from a path.

    Both forward and back slashes are treated as separators, whatever the
    host platform.

    Args:
        path: File name or path

    Returns:
        The last path segment
    """
    return path.replace("\\", "/").rsplit("/", 1)[-1]


def classify_file(path: str) -> FileClassification:
    """Classify a file by its suffix.

    Suffixes are matched case-sensitively against the base name. Unknown
    suffixes classify as OTHER; a `.zip` suffix is OTHER and compressed.
    The `.xml`/`.bsi` pair only applies to the reserved `index` base name,
    so `index.bsi` is compressed while `notes.bsi` is not.

    Args:
        path: File name or path

    Returns:
        FileClassification with the data type and compression flag
    """
    file_name = get_file_name(path)
    if file_name == DEFAULT_INDEX_FILE_NAME:
        return FileClassification(DataType.OTHER, is_compressed=False)
    if file_name == DEFAULT_INDEX_COMPRESSED_FILE_NAME:
        return FileClassification(DataType.OTHER, is_compressed=True)

    for raw_suffix, compressed_suffix, data_type in SUFFIX_PAIRS:
        if file_name.endswith(compressed_suffix):
            return FileClassification(data_type, is_compressed=True)
        if file_name.endswith(raw_suffix):
            return FileClassification(data_type, is_compressed=False)

    return FileClassification(
        DataType.OTHER, is_compressed=file_name.endswith(ZIP_FILE_EXTENSION)
    )


def is_compressed_path(path: str) -> bool:
    """Check whether a file name carries a compressed suffix."""
    return classify_file(path).is_compressed


def get_compressed_file_name(path: str) -> str:
    """Get the canonical compressed file name for a path.

    Examples:
        >>> get_compressed_file_name("data/orks.cat")
        'orks.catz'
        >>> get_compressed_file_name("index.xml")
        'index.bsi'
        >>> get_compressed_file_name("units.xml")
        'units.xml.zip'
        >>> get_compressed_file_name("README.md")
        'README.md.zip'

    Args:
        path: File name or path, compressed or not

    Returns:
        Single-segment compressed file name
    """
    file_name = get_file_name(path)
    if is_compressed_path(file_name):
        return file_name
    if file_name == DEFAULT_INDEX_FILE_NAME:
        return DEFAULT_INDEX_COMPRESSED_FILE_NAME

    for raw_suffix, compressed_suffix, _ in SUFFIX_PAIRS:
        if file_name.endswith(raw_suffix):
            return file_name[: -len(raw_suffix)] + compressed_suffix

    return file_name + ZIP_FILE_EXTENSION


def get_uncompressed_file_name(path: str) -> str:
    """Get the raw file name for a path.

    This is the inverse of get_compressed_file_name and names the single
    entry inside a compressed archive.

    Args:
        path: File name or path, compressed or not

    Returns:
        Single-segment uncompressed file name
    """
    file_name = get_file_name(path)
    if not is_compressed_path(file_name):
        return file_name
    if file_name == DEFAULT_INDEX_COMPRESSED_FILE_NAME:
        return DEFAULT_INDEX_FILE_NAME

    for raw_suffix, compressed_suffix, _ in SUFFIX_PAIRS:
        if file_name.endswith(compressed_suffix):
            return file_name[: -len(compressed_suffix)] + raw_suffix

    return file_name[: -len(ZIP_FILE_EXTENSION)]
