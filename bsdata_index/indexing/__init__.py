"""Indexing pipeline for BattleScribe data repositories."""

from bsdata_index.indexing.compression import (
    compress_data,
    decompress_data,
    normalize_repository_data,
)
from bsdata_index.indexing.filename_utils import (
    classify_file,
    get_compressed_file_name,
    get_file_name,
    get_uncompressed_file_name,
    is_compressed_path,
)
from bsdata_index.indexing.index_builder import IndexBuilder, build_index_url
from bsdata_index.indexing.index_serializer import read_data_index, write_data_index
from bsdata_index.indexing.metadata_extractor import MetadataExtractor
from bsdata_index.indexing.models import (
    Catalogue,
    DataIndex,
    DataIndexEntry,
    DataType,
    FileClassification,
    GameSystem,
    IndexBuildResult,
    Roster,
    SkippedFile,
)
from bsdata_index.indexing.pipeline import RepositoryData, create_repository_data

__all__ = [
    "Catalogue",
    "DataIndex",
    "DataIndexEntry",
    "DataType",
    "FileClassification",
    "GameSystem",
    "IndexBuildResult",
    "IndexBuilder",
    "MetadataExtractor",
    "RepositoryData",
    "Roster",
    "SkippedFile",
    "build_index_url",
    "classify_file",
    "compress_data",
    "create_repository_data",
    "decompress_data",
    "get_compressed_file_name",
    "get_file_name",
    "get_uncompressed_file_name",
    "is_compressed_path",
    "normalize_repository_data",
    "read_data_index",
    "write_data_index",
]
