import click
import json
import logging

from .config import get_log_level, get_tables
from .descriptions import TablesFormatError
from .speech import html_to_speech, xml_to_speech


@click.group()
@click.option('--verbose', '-v', is_flag=True, help="Log parsing details to stderr")
def cli(verbose):
    """Read web content aloud: HTML in, speakable text out"""
    try:
        level = get_log_level(verbose)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        raise click.Abort()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@cli.command()
@click.argument('source', type=click.File('rb'), default='-')
@click.option('--xml', 'strict_xml', is_flag=True, help="Parse as well-formed XHTML instead of HTML")
@click.option('--tables', 'tables_path', type=click.Path(exists=True, dir_okay=False),
              help="JSON file with description overrides")
def speak(source, strict_xml, tables_path):
    """Prints the spoken form of SOURCE (a file, or stdin)"""
    try:
        tables = get_tables(tables_path)
        markup = source.read()

        if strict_xml:
            spoken = xml_to_speech(markup, tables)
        else:
            spoken = html_to_speech(markup, tables)

        click.echo(spoken)

    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        logging.getLogger(__name__).debug("speak failed", exc_info=True)
        raise click.Abort()


@cli.command()
@click.option('--tables', 'tables_path', type=click.Path(exists=True, dir_okay=False),
              help="JSON file with description overrides")
def tables(tables_path):
    """Prints the description tables in effect, as JSON"""
    try:
        effective = get_tables(tables_path)
        click.echo(json.dumps(effective.to_dict(), indent=2, sort_keys=True))
    except (TablesFormatError, OSError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        raise click.Abort()


if __name__ == "__main__":
    cli()
