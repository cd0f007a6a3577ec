"""Metadata extraction from the root element of BattleScribe data files."""

import re

from lxml import etree

from bsdata_index.common.constants import (
    AUTHOR_CONTACT_ATTRIBUTE,
    AUTHOR_NAME_ATTRIBUTE,
    AUTHOR_URL_ATTRIBUTE,
    BATTLESCRIBE_VERSION_ATTRIBUTE,
    CATALOGUE_TAG,
    DESCRIPTION_ATTRIBUTE,
    GAME_SYSTEM_ID_ATTRIBUTE,
    GAME_SYSTEM_NAME_ATTRIBUTE,
    GAME_SYSTEM_REVISION_ATTRIBUTE,
    GAME_SYSTEM_TAG,
    ID_ATTRIBUTE,
    NAME_ATTRIBUTE,
    POINTS_ATTRIBUTE,
    POINTS_LIMIT_ATTRIBUTE,
    REVISION_ATTRIBUTE,
    ROSTER_TAG,
)
from bsdata_index.indexing.models import Catalogue, DataType, GameSystem, Roster
from bsdata_index.utils.config import DEFAULT_SCAN_CHUNK_SIZE
from bsdata_index.utils.exceptions import MalformedDocumentError
from bsdata_index.utils.logger import get_logger

logger = get_logger(__name__)

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
DOUBLE_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def _local_name(element: etree._Element) -> str:
    return etree.QName(element).localname


class MetadataExtractor:
    """Reads the root element attributes of game system, catalogue and roster files.

    Documents are fed to an incremental lxml pull parser in fixed-size
    chunks. Parsing stops at the first start tag matching the expected
    root element, so the cost depends on how far into the document that
    tag appears, not on the document size. No tree is kept.
    """

    def __init__(self, chunk_size: int = DEFAULT_SCAN_CHUNK_SIZE) -> None:
        """Initialize the extractor.

        Args:
            chunk_size: Number of bytes fed to the parser per step
        """
        if chunk_size < 1:
            raise ValueError("chunk_size must be positive")
        self.chunk_size = chunk_size

    def extract_attributes(self, data: bytes, tag: str) -> dict[str, str]:
        """Return the attributes of the first element named `tag`.

        The element name is compared case-insensitively, ignoring any
        namespace.

        Args:
            data: XML document bytes (already decompressed)
            tag: Expected element name

        Returns:
            Attribute name to value mapping

        Raises:
            MalformedDocumentError: If the document is not well-formed before
                the element, or ends without it
        """
        expected = tag.lower()
        # Entity expansion, DTDs and network access stay off for untrusted files
        parser = etree.XMLPullParser(
            events=("start",),
            resolve_entities=False,
            load_dtd=False,
            no_network=True,
        )

        try:
            for offset in range(0, len(data), self.chunk_size):
                parser.feed(data[offset : offset + self.chunk_size])
                for _, element in parser.read_events():
                    if _local_name(element).lower() == expected:
                        logger.debug("root_element_found", tag=tag, offset=offset)
                        return dict(element.attrib)
            parser.close()
        except etree.XMLSyntaxError as e:
            raise MalformedDocumentError(tag, str(e), cause=e) from e

        for _, element in parser.read_events():
            if _local_name(element).lower() == expected:
                return dict(element.attrib)

        raise MalformedDocumentError(tag, f"no <{tag}> element found")

    def read_game_system(self, data: bytes) -> GameSystem:
        """Read the metadata of a game system (.gst) document."""
        attributes = _Attributes(GAME_SYSTEM_TAG, self.extract_attributes(data, GAME_SYSTEM_TAG))
        return GameSystem(
            id=attributes.string(ID_ATTRIBUTE),
            battlescribe_version=attributes.string(BATTLESCRIBE_VERSION_ATTRIBUTE),
            revision=attributes.revision(REVISION_ATTRIBUTE),
            name=attributes.string(NAME_ATTRIBUTE),
            author_name=attributes.string(AUTHOR_NAME_ATTRIBUTE),
            author_contact=attributes.string(AUTHOR_CONTACT_ATTRIBUTE),
            author_url=attributes.string(AUTHOR_URL_ATTRIBUTE),
        )

    def read_catalogue(self, data: bytes) -> Catalogue:
        """Read the metadata of a catalogue (.cat) document."""
        attributes = _Attributes(CATALOGUE_TAG, self.extract_attributes(data, CATALOGUE_TAG))
        return Catalogue(
            id=attributes.string(ID_ATTRIBUTE),
            game_system_id=attributes.string(GAME_SYSTEM_ID_ATTRIBUTE),
            battlescribe_version=attributes.string(BATTLESCRIBE_VERSION_ATTRIBUTE),
            revision=attributes.revision(REVISION_ATTRIBUTE),
            name=attributes.string(NAME_ATTRIBUTE),
            author_name=attributes.string(AUTHOR_NAME_ATTRIBUTE),
            author_contact=attributes.string(AUTHOR_CONTACT_ATTRIBUTE),
            author_url=attributes.string(AUTHOR_URL_ATTRIBUTE),
        )

    def read_roster(self, data: bytes) -> Roster:
        """Read the metadata of a roster (.ros) document.

        `gameSystemName` and `gameSystemRevision` are optional.
        """
        attributes = _Attributes(ROSTER_TAG, self.extract_attributes(data, ROSTER_TAG))
        game_system_revision = None
        if GAME_SYSTEM_REVISION_ATTRIBUTE in attributes:
            game_system_revision = attributes.revision(GAME_SYSTEM_REVISION_ATTRIBUTE)

        return Roster(
            battlescribe_version=attributes.string(BATTLESCRIBE_VERSION_ATTRIBUTE),
            description=attributes.string(DESCRIPTION_ATTRIBUTE),
            name=attributes.string(NAME_ATTRIBUTE),
            points=attributes.double(POINTS_ATTRIBUTE),
            points_limit=attributes.double(POINTS_LIMIT_ATTRIBUTE),
            game_system_id=attributes.string(GAME_SYSTEM_ID_ATTRIBUTE),
            game_system_name=attributes.optional_string(GAME_SYSTEM_NAME_ATTRIBUTE),
            game_system_revision=game_system_revision,
        )

    def read_document(self, data: bytes, data_type: DataType) -> GameSystem | Catalogue | Roster:
        """Read the metadata for a classified data file.

        Args:
            data: XML document bytes (already decompressed)
            data_type: Classification of the file

        Returns:
            GameSystem, Catalogue or Roster

        Raises:
            MalformedDocumentError: If the metadata cannot be read
            ValueError: If data_type is OTHER
        """
        if data_type is DataType.GAME_SYSTEM:
            return self.read_game_system(data)
        if data_type is DataType.CATALOGUE:
            return self.read_catalogue(data)
        if data_type is DataType.ROSTER:
            return self.read_roster(data)
        raise ValueError(f"No metadata to read for data type {data_type.value!r}")


class _Attributes:
    """Typed access to root element attributes for one document."""

    def __init__(self, tag: str, values: dict[str, str]) -> None:
        self.tag = tag
        self.values = values

    def __contains__(self, name: str) -> bool:
        return name in self.values

    def string(self, name: str) -> str:
        value = self.values.get(name)
        if value is None:
            raise MalformedDocumentError(self.tag, f"missing required attribute {name!r}")
        return value

    def optional_string(self, name: str) -> str | None:
        return self.values.get(name)

    def integer(self, name: str) -> int:
        value = self.string(name)
        if not INTEGER_PATTERN.fullmatch(value):
            error = ValueError(f"invalid integer {value!r}")
            raise MalformedDocumentError(self.tag, f"attribute {name!r}: {error}", cause=error)
        return int(value)

    def revision(self, name: str) -> int:
        number = self.integer(name)
        if number < 0:
            error = ValueError(f"negative revision {number}")
            raise MalformedDocumentError(self.tag, f"attribute {name!r}: {error}", cause=error)
        return number

    def double(self, name: str) -> float:
        value = self.string(name)
        if not DOUBLE_PATTERN.fullmatch(value):
            error = ValueError(f"invalid number {value!r}")
            raise MalformedDocumentError(self.tag, f"attribute {name!r}: {error}", cause=error)
        return float(value)
