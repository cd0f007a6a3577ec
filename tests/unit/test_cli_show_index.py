"""Unit tests for show-index CLI command."""

from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

from bsdata_index.cli.show_index import show_index
from bsdata_index.indexing.compression import compress_data
from bsdata_index.indexing.index_builder import IndexBuilder
from bsdata_index.indexing.index_serializer import write_data_index


class TestShowIndexCLI:
    """Test show-index CLI command."""

    def test_shows_compressed_index(self, tmp_path: Path, data_files: dict[str, bytes]) -> None:
        """Test that entries of an index.bsi file are listed."""
        result = IndexBuilder().build(
            "wh40k", "https://example.com", ["https://mirror.example.com"], data_files
        )
        index_file = tmp_path / "index.bsi"
        index_file.write_bytes(compress_data("index.xml", write_data_index(result.data_index)))

        with patch("bsdata_index.utils.config.load_dotenv"):
            output = CliRunner().invoke(show_index, [str(index_file)])

        assert output.exit_code == 0, output.output
        assert "Repository: wh40k" in output.output
        assert "Mirror: https://mirror.example.com" in output.output
        assert "Entries: 3" in output.output
        assert "orks.catz" in output.output
        assert "985/1000 pts" in output.output

    def test_shows_raw_index(self, tmp_path: Path, data_files: dict[str, bytes]) -> None:
        """Test that an uncompressed index.xml is read directly."""
        result = IndexBuilder().build("wh40k", "https://example.com", None, data_files)
        index_file = tmp_path / "index.xml"
        index_file.write_bytes(write_data_index(result.data_index))

        with patch("bsdata_index.utils.config.load_dotenv"):
            output = CliRunner().invoke(show_index, [str(index_file)])

        assert output.exit_code == 0, output.output
        assert "wh40k.gstz" in output.output

    def test_invalid_index_aborts(self, tmp_path: Path) -> None:
        """Test that a corrupt index aborts with an error."""
        index_file = tmp_path / "index.bsi"
        index_file.write_bytes(b"not a zip")

        with patch("bsdata_index.utils.config.load_dotenv"):
            output = CliRunner().invoke(show_index, [str(index_file)])

        assert output.exit_code != 0
        assert "Error:" in output.output
