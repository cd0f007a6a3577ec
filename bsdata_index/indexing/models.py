"""Data models for BattleScribe data files and the repository index."""

from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, Field, field_validator


class DataType(str, Enum):
    """Kind of file in a data repository."""

    GAME_SYSTEM = "gamesystem"
    CATALOGUE = "catalogue"
    ROSTER = "roster"
    OTHER = "other"


@dataclass(frozen=True)
class FileClassification:
    """Result of classifying a file name.

    Attributes:
        data_type: Kind of data file
        is_compressed: Whether the name carries a compressed suffix
    """

    data_type: DataType
    is_compressed: bool


@dataclass(frozen=True)
class GameSystem:
    """Attributes of a `<gameSystem>` root element."""

    id: str
    battlescribe_version: str
    revision: int
    name: str
    author_name: str
    author_contact: str
    author_url: str


@dataclass(frozen=True)
class Catalogue:
    """Attributes of a `<catalogue>` root element."""

    id: str
    game_system_id: str
    battlescribe_version: str
    revision: int
    name: str
    author_name: str
    author_contact: str
    author_url: str


@dataclass(frozen=True)
class Roster:
    """Attributes of a `<roster>` root element.

    `game_system_name` and `game_system_revision` are only present in
    rosters saved by newer BattleScribe versions.
    """

    battlescribe_version: str
    description: str
    name: str
    points: float
    points_limit: float
    game_system_id: str
    game_system_name: str | None = None
    game_system_revision: int | None = None


class DataIndexEntry(BaseModel):
    """One indexed data file.

    Fields that do not apply to the entry's data type are left as None
    and are not written to the index document.
    """

    file_path: str
    data_type: DataType
    id: str | None = None
    game_system_id: str | None = None
    battlescribe_version: str
    revision: int | None = Field(default=None, ge=0)
    name: str
    author_name: str | None = None
    author_contact: str | None = None
    author_url: str | None = None
    description: str | None = None
    points: float | None = None
    points_limit: float | None = None
    game_system_name: str | None = None
    game_system_revision: int | None = Field(default=None, ge=0)

    @field_validator("file_path")
    @classmethod
    def validate_single_segment(cls, value: str) -> str:
        """Ensure the file path is a bare file name."""
        if not value or "/" in value or "\\" in value:
            raise ValueError(f"file_path must be a single path segment: {value!r}")
        return value

    @field_validator("data_type")
    @classmethod
    def validate_indexable(cls, value: DataType) -> DataType:
        """Reject data types that never get an index entry."""
        if value is DataType.OTHER:
            raise ValueError("Only game systems, catalogues and rosters can be indexed")
        return value

    @classmethod
    def from_game_system(cls, file_path: str, game_system: GameSystem) -> "DataIndexEntry":
        return cls(
            file_path=file_path,
            data_type=DataType.GAME_SYSTEM,
            id=game_system.id,
            battlescribe_version=game_system.battlescribe_version,
            revision=game_system.revision,
            name=game_system.name,
            author_name=game_system.author_name,
            author_contact=game_system.author_contact,
            author_url=game_system.author_url,
        )

    @classmethod
    def from_catalogue(cls, file_path: str, catalogue: Catalogue) -> "DataIndexEntry":
        return cls(
            file_path=file_path,
            data_type=DataType.CATALOGUE,
            id=catalogue.id,
            game_system_id=catalogue.game_system_id,
            battlescribe_version=catalogue.battlescribe_version,
            revision=catalogue.revision,
            name=catalogue.name,
            author_name=catalogue.author_name,
            author_contact=catalogue.author_contact,
            author_url=catalogue.author_url,
        )

    @classmethod
    def from_roster(cls, file_path: str, roster: Roster) -> "DataIndexEntry":
        return cls(
            file_path=file_path,
            data_type=DataType.ROSTER,
            game_system_id=roster.game_system_id,
            battlescribe_version=roster.battlescribe_version,
            name=roster.name,
            description=roster.description,
            points=roster.points,
            points_limit=roster.points_limit,
            game_system_name=roster.game_system_name,
            game_system_revision=roster.game_system_revision,
        )


class DataIndex(BaseModel):
    """Index of every data file in a repository.

    `index_url` is where clients fetch this index from; `repository_urls`
    lists optional mirror repositories.
    """

    repository_name: str
    index_url: str
    repository_urls: list[str] = Field(default_factory=list)
    entries: list[DataIndexEntry] = Field(default_factory=list)


@dataclass(frozen=True)
class SkippedFile:
    """A data file left out of the index.

    Attributes:
        file_name: Name of the file as given in the input map
        reason: Error message explaining why it was skipped
        error_type: Exception class name
    """

    file_name: str
    reason: str
    error_type: str


@dataclass
class IndexBuildResult:
    """Data index plus the files that could not be indexed."""

    data_index: DataIndex
    skipped_files: list[SkippedFile] = field(default_factory=list)
