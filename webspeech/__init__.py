"""Turns web content markup into text for speech synthesis."""
from .content_handler import MarkupStreamError, StackUnderflowError, TextRangeError, WebContentHandler
from .descriptions import DescriptionTables, TablesFormatError, load_tables
from .speech import file_to_speech, html_to_speech, xml_to_speech

__all__ = [
    "DescriptionTables",
    "MarkupStreamError",
    "StackUnderflowError",
    "TablesFormatError",
    "TextRangeError",
    "WebContentHandler",
    "file_to_speech",
    "html_to_speech",
    "load_tables",
    "xml_to_speech",
]
