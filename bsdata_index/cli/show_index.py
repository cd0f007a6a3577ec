"""CLI command for displaying the entries of a repository index."""

from pathlib import Path

import click

from bsdata_index.indexing.compression import decompress_data
from bsdata_index.indexing.filename_utils import is_compressed_path
from bsdata_index.indexing.index_serializer import read_data_index
from bsdata_index.indexing.models import DataIndexEntry
from bsdata_index.utils.config import Config
from bsdata_index.utils.exceptions import BSDataIndexError
from bsdata_index.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


def _format_entry(entry: DataIndexEntry) -> str:
    revision = f"r{entry.revision}" if entry.revision is not None else "-"
    line = f"  {entry.data_type.value:<10} {entry.file_path:<40} {revision:<6} {entry.name}"
    if entry.points is not None and entry.points_limit is not None:
        line += f" ({entry.points:g}/{entry.points_limit:g} pts)"
    return line


@click.command()
@click.argument("index_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def show_index(index_file: Path) -> None:
    """Display the contents of INDEX_FILE (index.bsi or index.xml)."""
    try:
        config = Config()
        configure_logging(config.log_level, config.log_format)
        data = index_file.read_bytes()
        if is_compressed_path(index_file.name):
            data = decompress_data(data)
        data_index = read_data_index(data)
    except (BSDataIndexError, OSError) as e:
        logger.error("show_index_failed", error=str(e), error_type=type(e).__name__)
        click.echo(f"Error: {e}", err=True)
        raise click.Abort from e

    click.echo(f"Repository: {data_index.repository_name}")
    click.echo(f"Index URL: {data_index.index_url}")
    for url in data_index.repository_urls:
        click.echo(f"Mirror: {url}")
    click.echo(f"Entries: {len(data_index.entries)}")
    for entry in data_index.entries:
        click.echo(_format_entry(entry))


if __name__ == "__main__":
    show_index()
