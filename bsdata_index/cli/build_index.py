"""CLI command for building a compressed data repository with its index."""

from pathlib import Path

import click

from bsdata_index.cli.utils import load_data_files, write_repository_files
from bsdata_index.indexing.pipeline import RepositoryData, create_repository_data
from bsdata_index.utils.config import Config
from bsdata_index.utils.exceptions import BSDataIndexError
from bsdata_index.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


def _display_summary(repository_data: RepositoryData, output_dir: Path) -> None:
    """Display repository build summary."""
    data_index = repository_data.data_index
    click.echo()
    click.echo("=" * 80)
    click.echo("Repository Build Complete!")
    click.echo("=" * 80)
    click.echo(f"  Repository: {data_index.repository_name}")
    click.echo(f"  Index URL: {data_index.index_url}")
    click.echo(f"  Files Written: {len(repository_data.files)}")
    click.echo(f"  Index Entries: {len(data_index.entries)}")
    click.echo(f"  Files Skipped: {len(repository_data.skipped_files)}")
    for skipped in repository_data.skipped_files:
        click.echo(f"    - {skipped.file_name}: {skipped.reason}")
    if repository_data.dropped_files:
        click.echo(f"  Files Dropped: {len(repository_data.dropped_files)}")
        for file_name in repository_data.dropped_files:
            click.echo(f"    - {file_name}: name reserved for the generated index")
    click.echo()
    click.echo(f"Output written to: {output_dir}")


@click.command()
@click.argument(
    "source_dir", type=click.Path(exists=True, file_okay=False, path_type=Path)
)
@click.argument("output_dir", type=click.Path(file_okay=False, path_type=Path))
@click.option("--repository-name", required=True, help="Name of the repository")
@click.option(
    "--base-url",
    default=None,
    help="URL prefix for the index URL (default: BSDATA_BASE_URL)",
)
@click.option(
    "--repository-url",
    "repository_urls",
    multiple=True,
    help="Mirror repository URL to list in the index (repeatable)",
)
@click.option(
    "--max-workers",
    type=click.IntRange(min=1),
    default=None,
    help="Number of threads used to read data files (default: BSDATA_MAX_WORKERS or 1)",
)
def build_index(  # noqa: PLR0913
    source_dir: Path,
    output_dir: Path,
    repository_name: str,
    base_url: str | None,
    repository_urls: tuple[str, ...],
    max_workers: int | None,
) -> None:
    """Index and compress the data files in SOURCE_DIR into OUTPUT_DIR.

    Game systems, catalogues and rosters get an entry in index.bsi. Every
    file is written with its compressed name. Files that cannot be indexed
    are still written and are listed in the summary.

    Examples:

        \b
        build-index data/wh40k out/wh40k --repository-name wh40k \\
            --base-url https://example.com/data
    """
    try:
        config = Config()
        configure_logging(config.log_level, config.log_format)
        base_url = base_url or config.require_base_url()

        data_files = load_data_files(source_dir)
        click.echo(f"Loaded {len(data_files)} files from: {source_dir}")

        repository_data = create_repository_data(
            repository_name,
            base_url,
            list(repository_urls),
            data_files,
            max_workers=max_workers or config.max_workers,
            show_progress=True,
            scan_chunk_size=config.scan_chunk_size,
        )
        write_repository_files(repository_data.files, output_dir)
    except (BSDataIndexError, OSError, ValueError) as e:
        logger.error("build_index_failed", error=str(e), error_type=type(e).__name__)
        click.echo(f"Error: {e}", err=True)
        raise click.Abort from e

    _display_summary(repository_data, output_dir)


if __name__ == "__main__":
    build_index()
