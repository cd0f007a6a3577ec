"""Data index assembly from a repository snapshot."""

from collections import Counter
from collections.abc import Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor

from pydantic import HttpUrl, TypeAdapter, ValidationError
from tqdm import tqdm

from bsdata_index.common.constants import DEFAULT_INDEX_COMPRESSED_FILE_NAME
from bsdata_index.indexing.compression import decompress_data
from bsdata_index.indexing.filename_utils import classify_file, get_compressed_file_name
from bsdata_index.indexing.metadata_extractor import MetadataExtractor
from bsdata_index.indexing.models import (
    Catalogue,
    DataIndex,
    DataIndexEntry,
    DataType,
    GameSystem,
    IndexBuildResult,
    Roster,
    SkippedFile,
)
from bsdata_index.utils.exceptions import (
    CompressionError,
    InvalidUrlError,
    MalformedDocumentError,
)
from bsdata_index.utils.logger import get_logger

FILE_NAME_COLLISION = "FileNameCollision"

_http_url = TypeAdapter(HttpUrl)


def build_index_url(base_url: str, repository_name: str) -> str:
    """Build the URL the repository index is served from.

    Args:
        base_url: URL prefix for all repositories (a trailing slash is ignored)
        repository_name: Name of the repository

    Returns:
        `<base_url>/<repository_name>/index.bsi`

    Raises:
        InvalidUrlError: If the result is not an absolute http(s) URL
    """
    if not repository_name or "/" in repository_name:
        raise InvalidUrlError(f"Invalid repository name: {repository_name!r}")

    index_url = f"{base_url.rstrip('/')}/{repository_name}/{DEFAULT_INDEX_COMPRESSED_FILE_NAME}"
    try:
        _http_url.validate_python(index_url)
    except ValidationError as e:
        raise InvalidUrlError(f"Invalid index URL {index_url!r}: {e}") from e
    return index_url


class IndexBuilder:
    """Builds a DataIndex from a map of file name to file contents.

    Each game system, catalogue and roster gets one entry keyed by its
    canonical compressed file name. Files whose metadata cannot be read are
    left out of the index and reported as skipped; they never abort the
    build. When two data files share a compressed name only the one whose
    bytes are delivered (the later in sorted order) is indexed. Entries are
    sorted by file name so the output does not depend on input order or on
    worker scheduling.
    """

    def __init__(
        self,
        extractor: MetadataExtractor | None = None,
        max_workers: int = 1,
        show_progress: bool = False,
    ) -> None:
        """Initialize the builder.

        Args:
            extractor: Metadata extractor (default: MetadataExtractor())
            max_workers: Number of threads used to read files
            show_progress: Show a tqdm progress bar
        """
        if max_workers < 1:
            raise ValueError("max_workers must be positive")
        self.extractor = extractor or MetadataExtractor()
        self.max_workers = max_workers
        self.show_progress = show_progress
        self.logger = get_logger(__name__, component="index_builder")

    def build(
        self,
        repository_name: str,
        base_url: str,
        repository_urls: list[str] | None,
        data_files: dict[str, bytes],
    ) -> IndexBuildResult:
        """Build the data index for a repository snapshot.

        Args:
            repository_name: Name of the repository
            base_url: URL prefix the index URL is built from
            repository_urls: Optional mirror repository URLs
            data_files: File name (or path) to raw or compressed contents

        Returns:
            IndexBuildResult with the index and the skipped files

        Raises:
            InvalidUrlError: If the index URL is not valid
        """
        index_url = build_index_url(base_url, repository_name)

        # The file each compressed name is delivered from; later sorted names win
        sources = {get_compressed_file_name(name): name for name in sorted(data_files)}

        entries: list[DataIndexEntry] = []
        skipped_files: list[SkippedFile] = []
        with tqdm(
            desc="Indexing files",
            unit="file",
            total=len(data_files),
            disable=not self.show_progress,
        ) as pbar:
            for file_name, result in self._index_files(data_files):
                if isinstance(result, DataIndexEntry):
                    source = sources[result.file_path]
                    if source == file_name:
                        entries.append(result)
                    else:
                        skipped_files.append(self._replaced_file(file_name, result, source))
                elif isinstance(result, SkippedFile):
                    skipped_files.append(result)
                pbar.update(1)

        entries.sort(key=lambda entry: entry.file_path)
        data_index = DataIndex(
            repository_name=repository_name,
            index_url=index_url,
            repository_urls=list(repository_urls or []),
            entries=entries,
        )
        skipped_files.sort(key=lambda skipped: skipped.file_name)
        self._warn_duplicate_ids(data_index.entries)

        self.logger.info(
            "index_built",
            repository_name=repository_name,
            index_url=index_url,
            files=len(data_files),
            entries=len(data_index.entries),
            skipped=len(skipped_files),
        )
        return IndexBuildResult(data_index=data_index, skipped_files=skipped_files)

    def _index_files(
        self, data_files: dict[str, bytes]
    ) -> Iterator[tuple[str, DataIndexEntry | SkippedFile | None]]:
        """Index each file, in a thread pool when max_workers > 1."""
        file_names = sorted(data_files)
        if self.max_workers == 1:
            for file_name in file_names:
                yield file_name, self.index_file(file_name, data_files[file_name])
            return

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            results: Iterable[DataIndexEntry | SkippedFile | None] = executor.map(
                lambda name: self.index_file(name, data_files[name]), file_names
            )
            yield from zip(file_names, results)

    def index_file(self, file_name: str, data: bytes) -> DataIndexEntry | SkippedFile | None:
        """Build the index entry for a single file.

        Args:
            file_name: File name (or path) as given in the input map
            data: Raw or compressed file contents

        Returns:
            DataIndexEntry for a readable data file, SkippedFile if the file
            could not be decompressed, read or turned into an entry, or None
            if the file is not a data file
        """
        classification = classify_file(file_name)
        if classification.data_type is DataType.OTHER:
            return None

        file_path = get_compressed_file_name(file_name)
        try:
            if classification.is_compressed:
                data = decompress_data(data)
            document = self.extractor.read_document(data, classification.data_type)
            entry = self._create_entry(file_path, document)
        # pydantic's ValidationError is a ValueError
        except (MalformedDocumentError, CompressionError, ValueError) as e:
            self.logger.warning(
                "file_skipped",
                file_name=file_name,
                error=str(e),
                error_type=type(e).__name__,
            )
            return SkippedFile(file_name=file_name, reason=str(e), error_type=type(e).__name__)

        self.logger.debug("file_indexed", file_name=file_name, file_path=file_path)
        return entry

    @staticmethod
    def _create_entry(file_path: str, document: GameSystem | Catalogue | Roster) -> DataIndexEntry:
        if isinstance(document, GameSystem):
            return DataIndexEntry.from_game_system(file_path, document)
        if isinstance(document, Catalogue):
            return DataIndexEntry.from_catalogue(file_path, document)
        return DataIndexEntry.from_roster(file_path, document)

    def _replaced_file(self, file_name: str, entry: DataIndexEntry, source: str) -> SkippedFile:
        """Report a data file whose compressed name is taken by a later file."""
        self.logger.warning(
            "file_name_collision",
            file_name=entry.file_path,
            replaced=file_name,
            source=source,
        )
        return SkippedFile(
            file_name=file_name,
            reason=f"{entry.file_path} is delivered from {source}",
            error_type=FILE_NAME_COLLISION,
        )

    def _warn_duplicate_ids(self, entries: list[DataIndexEntry]) -> None:
        """Log entries sharing an id; both are kept in the index."""
        counts = Counter((entry.data_type, entry.id) for entry in entries if entry.id is not None)
        for (data_type, entry_id), count in counts.items():
            if count > 1:
                self.logger.warning(
                    "duplicate_entry_id",
                    data_type=data_type.value,
                    id=entry_id,
                    count=count,
                )
