"""Unit tests for file classification and compressed-name utilities."""

import pytest

from bsdata_index.indexing.filename_utils import (
    classify_file,
    get_compressed_file_name,
    get_file_name,
    get_uncompressed_file_name,
    is_compressed_path,
)
from bsdata_index.indexing.models import DataType, FileClassification


class TestGetFileName:
    """Test cases for get_file_name function."""

    def test_bare_name_unchanged(self) -> None:
        """Test that a name without directories is returned as is."""
        assert get_file_name("orks.cat") == "orks.cat"

    def test_forward_slash_directories_stripped(self) -> None:
        """Test that POSIX-style directories are removed."""
        assert get_file_name("data/catalogues/orks.cat") == "orks.cat"

    def test_backslash_directories_stripped(self) -> None:
        """Test that Windows-style directories are removed on any platform."""
        assert get_file_name("data\\catalogues\\orks.catz") == "orks.catz"


class TestClassifyFile:
    """Test cases for classify_file function."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("wh40k.gst", FileClassification(DataType.GAME_SYSTEM, False)),
            ("wh40k.gstz", FileClassification(DataType.GAME_SYSTEM, True)),
            ("orks.cat", FileClassification(DataType.CATALOGUE, False)),
            ("orks.catz", FileClassification(DataType.CATALOGUE, True)),
            ("army.ros", FileClassification(DataType.ROSTER, False)),
            ("army.rosz", FileClassification(DataType.ROSTER, True)),
            ("index.xml", FileClassification(DataType.OTHER, False)),
            ("index.bsi", FileClassification(DataType.OTHER, True)),
            ("units.xml", FileClassification(DataType.OTHER, False)),
            ("notes.bsi", FileClassification(DataType.OTHER, False)),
            ("README.md", FileClassification(DataType.OTHER, False)),
            ("README.md.zip", FileClassification(DataType.OTHER, True)),
        ],
    )
    def test_known_suffixes(self, name: str, expected: FileClassification) -> None:
        """Test classification of every known suffix."""
        assert classify_file(name) == expected

    def test_path_is_classified_by_base_name(self) -> None:
        """Test that directories do not affect classification."""
        assert classify_file("a.cat/orks.ros").data_type is DataType.ROSTER

    def test_suffix_match_is_case_sensitive(self) -> None:
        """Test that upper-case suffixes are not recognised."""
        assert classify_file("ORKS.CAT").data_type is DataType.OTHER

    def test_no_suffix_is_other(self) -> None:
        """Test that a name without an extension is OTHER and uncompressed."""
        assert classify_file("LICENSE") == FileClassification(DataType.OTHER, False)

    @pytest.mark.parametrize("name", ["wh40k.gst", "orks.cat", "army.ros", "notes.txt"])
    def test_compressed_and_raw_names_share_data_type(self, name: str) -> None:
        """Test that a file keeps its data type once compressed."""
        compressed = get_compressed_file_name(name)
        assert classify_file(compressed).data_type is classify_file(name).data_type
        assert is_compressed_path(compressed)
        assert not is_compressed_path(name)


class TestGetCompressedFileName:
    """Test cases for get_compressed_file_name function."""

    def test_data_files(self) -> None:
        """Test that data file suffixes gain a trailing z."""
        assert get_compressed_file_name("wh40k.gst") == "wh40k.gstz"
        assert get_compressed_file_name("orks.cat") == "orks.catz"
        assert get_compressed_file_name("army.ros") == "army.rosz"

    def test_index_file(self) -> None:
        """Test that index.xml becomes index.bsi."""
        assert get_compressed_file_name("index.xml") == "index.bsi"
        assert get_compressed_file_name("catalogues/index.xml") == "index.bsi"

    def test_other_xml_file_is_not_an_index(self) -> None:
        """Test that only the index base name maps to the .bsi suffix."""
        assert get_compressed_file_name("units.xml") == "units.xml.zip"
        assert get_compressed_file_name("my_index.xml") == "my_index.xml.zip"
        assert get_uncompressed_file_name("units.xml.zip") == "units.xml"

    def test_other_file_gets_zip_suffix(self) -> None:
        """Test that unknown files are named as plain zips."""
        assert get_compressed_file_name("docs/README.md") == "README.md.zip"

    def test_compressed_name_only_loses_directories(self) -> None:
        """Test that already-compressed names keep their suffix."""
        assert get_compressed_file_name("data/orks.catz") == "orks.catz"
        assert get_compressed_file_name("README.md.zip") == "README.md.zip"

    def test_idempotent(self) -> None:
        """Test that compressing a compressed name is a no-op."""
        for name in ["wh40k.gst", "orks.cat", "army.ros", "index.xml", "notes.txt"]:
            once = get_compressed_file_name(name)
            assert get_compressed_file_name(once) == once


class TestGetUncompressedFileName:
    """Test cases for get_uncompressed_file_name function."""

    def test_inverse_of_compressed_name(self) -> None:
        """Test that uncompressing restores the raw base name."""
        for name in ["wh40k.gst", "orks.cat", "army.ros", "index.xml", "units.xml", "notes.txt"]:
            assert get_uncompressed_file_name(get_compressed_file_name(name)) == name

    def test_raw_name_only_loses_directories(self) -> None:
        """Test that raw names are returned without directories."""
        assert get_uncompressed_file_name("catalogues/orks.cat") == "orks.cat"
