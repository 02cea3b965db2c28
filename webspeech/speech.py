"""
Parse HTML (or XHTML) with lxml and turn it into text for speaking.
"""
import logging
from functools import partial
from pathlib import Path
from typing import Optional, Union

from lxml import etree

from .config import get_tables
from .content_handler import WebContentHandler
from .descriptions import DescriptionTables

logger = logging.getLogger(__name__)

Markup = Union[str, bytes]


def html_to_speech(markup: Markup, tables: Optional[DescriptionTables] = None) -> str:
    """
    Convert an HTML snippet or page into a string for speech synthesis.

    lxml's HTML parser is forgiving: it closes open tags and may wrap the
    content in implicit html/body elements.

    Args:
        markup: HTML text
        tables: Description tables (configured defaults if not given)

    Returns:
        The spoken form of the markup
    """
    return _run(etree.HTMLParser, markup, tables)


def xml_to_speech(markup: Markup, tables: Optional[DescriptionTables] = None) -> str:
    """
    Same as html_to_speech, for well-formed XHTML.

    Raises:
        etree.XMLSyntaxError: If the markup is not well-formed
    """
    return _run(partial(etree.XMLParser, resolve_entities=False), markup, tables)


def file_to_speech(path: str, tables: Optional[DescriptionTables] = None, xml: bool = False) -> str:
    """Read markup from a file and convert it."""
    markup = Path(path).read_bytes()
    if xml:
        return xml_to_speech(markup, tables)
    return html_to_speech(markup, tables)


def _run(parser_class, markup: Markup, tables: Optional[DescriptionTables]) -> str:
    if tables is None:
        tables = get_tables()

    handler = WebContentHandler(tables)
    handler.start_document()
    parser = parser_class(target=handler)

    logger.debug("Parsing %d characters of markup", len(markup))
    # Empty input never reaches the target, and lxml refuses to close a parser that saw nothing
    if not markup.strip():
        return handler.get_output()

    parser.feed(markup)
    output = parser.close()
    logger.debug("Produced %d characters of speech", len(output))
    return output
