"""Repository data creation: index, then compress everything."""

from dataclasses import dataclass, field
from typing import Any

from bsdata_index.common.constants import (
    DEFAULT_INDEX_COMPRESSED_FILE_NAME,
    DEFAULT_INDEX_FILE_NAME,
)
from bsdata_index.indexing.compression import compress_data, normalize_repository_data
from bsdata_index.indexing.filename_utils import get_compressed_file_name
from bsdata_index.indexing.index_builder import IndexBuilder
from bsdata_index.indexing.index_serializer import write_data_index
from bsdata_index.indexing.metadata_extractor import MetadataExtractor
from bsdata_index.indexing.models import DataIndex, SkippedFile
from bsdata_index.utils.config import DEFAULT_SCAN_CHUNK_SIZE
from bsdata_index.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class RepositoryData:
    """Complete, compressed repository ready to be cached or served.

    Attributes:
        files: Compressed file name to compressed contents, including the index
        data_index: The index written to `index.bsi`
        skipped_files: Data files left out of the index
        dropped_files: Input files left out of `files` because their
            compressed name is the reserved `index.bsi`
    """

    files: dict[str, bytes]
    data_index: DataIndex
    skipped_files: list[SkippedFile] = field(default_factory=list)
    dropped_files: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Summarize the run for logging or JSON output."""
        return {
            "repository_name": self.data_index.repository_name,
            "index_url": self.data_index.index_url,
            "files": len(self.files),
            "entries": len(self.data_index.entries),
            "skipped_files": [skipped.file_name for skipped in self.skipped_files],
            "dropped_files": list(self.dropped_files),
        }


def create_repository_data(
    repository_name: str,
    base_url: str,
    repository_urls: list[str] | None,
    data_files: dict[str, bytes],
    *,
    max_workers: int = 1,
    show_progress: bool = False,
    scan_chunk_size: int = DEFAULT_SCAN_CHUNK_SIZE,
) -> RepositoryData:
    """Create a complete data repository from a set of data files.

    1. A data index is built from the data files.
    2. Every data file is compressed and given its compressed name.
    3. The index is written as `index.xml` and compressed to `index.bsi`.

    `index.bsi` always holds the generated index: any input that would
    compress to that name (`index.xml` or `index.bsi` in any directory) is
    dropped and reported in `dropped_files`.

    The caller's `data_files` map is not modified.

    Args:
        repository_name: Name of the repository
        base_url: URL prefix the index URL is built from
        repository_urls: Optional mirror repository URLs listed in the index
        data_files: File name (or path) to raw or compressed contents
        max_workers: Number of threads used to read data files
        show_progress: Show a progress bar while indexing
        scan_chunk_size: Bytes fed to the XML parser per step

    Returns:
        RepositoryData with the compressed files, index and skipped files

    Raises:
        InvalidUrlError: If base_url and repository_name do not form a valid URL
        SerializationError: If the index cannot be written
        CompressionError: If a file cannot be compressed
    """
    builder = IndexBuilder(
        extractor=MetadataExtractor(chunk_size=scan_chunk_size),
        max_workers=max_workers,
        show_progress=show_progress,
    )
    result = builder.build(repository_name, base_url, repository_urls, data_files)

    dropped_files = [
        file_name
        for file_name in sorted(data_files)
        if get_compressed_file_name(file_name) == DEFAULT_INDEX_COMPRESSED_FILE_NAME
    ]
    if dropped_files:
        logger.warning(
            "reserved_file_dropped",
            file_name=DEFAULT_INDEX_COMPRESSED_FILE_NAME,
            dropped_files=dropped_files,
        )

    compressed_files = normalize_repository_data(
        {name: data for name, data in data_files.items() if name not in dropped_files}
    )
    compressed_files[DEFAULT_INDEX_COMPRESSED_FILE_NAME] = compress_data(
        DEFAULT_INDEX_FILE_NAME, write_data_index(result.data_index)
    )

    repository_data = RepositoryData(
        files=compressed_files,
        data_index=result.data_index,
        skipped_files=result.skipped_files,
        dropped_files=dropped_files,
    )
    logger.info("repository_data_created", **repository_data.to_dict())
    return repository_data
