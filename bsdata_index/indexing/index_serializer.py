"""Reading and writing the repository data index XML document."""

from lxml import etree
from pydantic import ValidationError

from bsdata_index.common.constants import (
    DATA_INDEX_ENTRIES_TAG,
    DATA_INDEX_ENTRY_TAG,
    DATA_INDEX_NAMESPACE,
    DATA_INDEX_TAG,
    REPOSITORY_URL_TAG,
    REPOSITORY_URLS_TAG,
    XML_DECLARATION,
)
from bsdata_index.indexing.models import DataIndex, DataIndexEntry, DataType
from bsdata_index.utils.exceptions import SerializationError
from bsdata_index.utils.logger import get_logger

logger = get_logger(__name__)

# DataIndexEntry field -> dataIndexEntry attribute, in document order
ENTRY_ATTRIBUTES: list[tuple[str, str]] = [
    ("file_path", "filePath"),
    ("data_type", "dataType"),
    ("id", "dataId"),
    ("game_system_id", "dataGameSystemId"),
    ("battlescribe_version", "dataBattleScribeVersion"),
    ("revision", "dataRevision"),
    ("name", "dataName"),
    ("author_name", "authorName"),
    ("author_contact", "authorContact"),
    ("author_url", "authorUrl"),
    ("description", "description"),
    ("points", "points"),
    ("points_limit", "pointsLimit"),
    ("game_system_name", "gameSystemName"),
    ("game_system_revision", "gameSystemRevision"),
]


def _qualified(tag: str) -> str:
    return f"{{{DATA_INDEX_NAMESPACE}}}{tag}"


def _format_value(value: object) -> str:
    if isinstance(value, DataType):
        return value.value
    if isinstance(value, float):
        return repr(value)
    return str(value)


def write_data_index(data_index: DataIndex) -> bytes:
    """Serialize a data index to XML.

    The output starts with the exact declaration line
    `<?xml version="1.0" encoding="UTF-8" standalone="yes"?>`, uses
    two-space indentation and `\\n` line endings. Entry fields that are
    None are omitted.

    Args:
        data_index: Index to serialize

    Returns:
        UTF-8 encoded XML bytes

    Raises:
        SerializationError: If the index cannot be encoded
    """
    try:
        root = etree.Element(_qualified(DATA_INDEX_TAG), nsmap={None: DATA_INDEX_NAMESPACE})
        root.set("name", data_index.repository_name)
        root.set("indexUrl", data_index.index_url)

        repository_urls = etree.SubElement(root, _qualified(REPOSITORY_URLS_TAG))
        for url in data_index.repository_urls:
            etree.SubElement(repository_urls, _qualified(REPOSITORY_URL_TAG)).text = url

        entries = etree.SubElement(root, _qualified(DATA_INDEX_ENTRIES_TAG))
        for entry in data_index.entries:
            element = etree.SubElement(entries, _qualified(DATA_INDEX_ENTRY_TAG))
            for field_name, attribute in ENTRY_ATTRIBUTES:
                value = getattr(entry, field_name)
                if value is not None:
                    element.set(attribute, _format_value(value))

        etree.indent(root, space="  ")
        body = etree.tostring(root, encoding="UTF-8", xml_declaration=False, pretty_print=True)
    except (ValueError, TypeError) as e:
        raise SerializationError(f"Failed to write data index: {e}") from e

    return XML_DECLARATION.encode("utf-8") + b"\n" + body


def _children(element: etree._Element, tag: str) -> list[etree._Element]:
    return [
        child
        for child in element
        if isinstance(child.tag, str) and etree.QName(child).localname == tag
    ]


def read_data_index(data: bytes) -> DataIndex:
    """Parse a data index XML document.

    Elements are matched by local name, so documents written with or
    without the data index namespace are accepted.

    Args:
        data: XML bytes as produced by write_data_index

    Returns:
        The parsed DataIndex

    Raises:
        SerializationError: If the document is not a valid data index
    """
    parser = etree.XMLParser(resolve_entities=False, load_dtd=False, no_network=True)
    try:
        root = etree.fromstring(data, parser=parser)
    except etree.XMLSyntaxError as e:
        raise SerializationError(f"Malformed data index XML: {e}") from e

    if etree.QName(root).localname != DATA_INDEX_TAG:
        raise SerializationError(f"Expected <{DATA_INDEX_TAG}> root element, got <{root.tag}>")

    repository_urls = [
        (url.text or "").strip()
        for container in _children(root, REPOSITORY_URLS_TAG)
        for url in _children(container, REPOSITORY_URL_TAG)
    ]

    entries = []
    try:
        for container in _children(root, DATA_INDEX_ENTRIES_TAG):
            for element in _children(container, DATA_INDEX_ENTRY_TAG):
                values = {
                    field_name: element.get(attribute)
                    for field_name, attribute in ENTRY_ATTRIBUTES
                    if element.get(attribute) is not None
                }
                entries.append(DataIndexEntry.model_validate(values))

        data_index = DataIndex(
            repository_name=root.get("name"),
            index_url=root.get("indexUrl"),
            repository_urls=repository_urls,
            entries=entries,
        )
    except ValidationError as e:
        raise SerializationError(f"Invalid data index: {e}") from e

    logger.debug("data_index_read", repository_name=data_index.repository_name, entries=len(entries))
    return data_index
