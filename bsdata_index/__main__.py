"""Main entry point for the BSData repository indexer."""

import sys

import click

from bsdata_index.cli.build_index import build_index
from bsdata_index.cli.show_index import show_index


@click.group()
@click.version_option(package_name="bsdata-index")
def cli() -> None:
    """Build and inspect BattleScribe data repository indexes."""


cli.add_command(build_index)
cli.add_command(show_index)


def main() -> int:
    """Main application entry point.

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    try:
        cli.main(standalone_mode=False)
        return 0
    except click.exceptions.Abort:
        click.echo("Aborted!", err=True)
        return 1
    except click.ClickException as e:
        e.show()
        return e.exit_code


if __name__ == "__main__":
    sys.exit(main())
