"""
Turns markup parser events into a single string for speech output.

The handler follows lxml's parser target protocol (start/data/end/close), so it
can be handed straight to ``etree.HTMLParser(target=...)``.
"""
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from .descriptions import DescriptionTables

logger = logging.getLogger(__name__)

INPUT_TAG = "input"

# Their value attribute is a form token, not something to read out
_UNSPOKEN_VALUE_KINDS = ("checkbox", "radio")

# Non-breaking spaces do not count as a separator
_NON_BREAKING_SPACES = "\xa0\u2007\u202f"

Attributes = Union[Mapping[str, str], Iterable[Tuple[str, str]]]


class MarkupStreamError(RuntimeError):
    """The event stream did not follow the start/data/end nesting contract."""


class StackUnderflowError(MarkupStreamError):
    """An element end arrived with no open element left."""


class TextRangeError(MarkupStreamError):
    """A character slice pointed outside the supplied text."""


class WebContentHandler:
    """
    Builds spoken text from a stream of element and character events.

    Labels (aria-label, alt, title) and values are spoken when an element
    opens. The element's role description is held on a stack and spoken once
    the element closes, after its content.
    """

    def __init__(self, tables: Optional[DescriptionTables] = None):
        """
        Args:
            tables: Description tables shared with other handlers. Empty
                tables are used if none are given.
        """
        self.tables = tables if tables is not None else DescriptionTables.empty()
        self.start_document()

    def start_document(self) -> None:
        """Reset the output and the pending role stack for a new document."""
        self._output: List[str] = []
        self._last_char = ""
        self._postorder_stack: List[str] = []
        self._failed = False

    @property
    def depth(self) -> int:
        """Number of elements currently open."""
        return len(self._postorder_stack)

    @property
    def failed(self) -> bool:
        return self._failed

    def start(self, tag: str, attrib: Attributes) -> None:
        """
        Speak the element's label and value, then queue its role description.

        Args:
            tag: Element tag name
            attrib: Attribute names mapped to values
        """
        self._check_usable()
        attrs = dict(attrib)
        self.fix_whitespace()

        # First label found wins
        for name in ("aria-label", "alt", "title"):
            label = attrs.get(name)
            if label is not None:
                self._append(label)
                break

        value = attrs.get("value")
        if value is not None and not _is_checkable(tag, attrs):
            self.fix_whitespace()
            self._append(value)

        # Always push, even a blank string, so the matching end has something to pop
        self._postorder_stack.append(self._resolve_postorder_text(tag, attrs))

    def data(self, chars: str) -> None:
        """Character data goes straight to the output."""
        self._check_usable()
        self._append(chars)

    def characters(self, chars: str, start: int = 0, length: Optional[int] = None) -> None:
        """
        Append ``length`` characters of ``chars`` beginning at ``start``.

        Raises:
            TextRangeError: If the slice falls outside ``chars``.
        """
        self._check_usable()
        if length is None:
            length = len(chars) - start
        if start < 0 or length < 0 or start + length > len(chars):
            self._failed = True
            raise TextRangeError(
                f"Character range start={start} length={length} is outside text of length {len(chars)}"
            )
        self._append(chars[start:start + length])

    def end(self, tag: str) -> None:
        """
        Speak the role description queued when the element opened.

        Raises:
            StackUnderflowError: If no element is open.
        """
        self._check_usable()
        if not self._postorder_stack:
            self._failed = True
            raise StackUnderflowError(f"End of <{tag}> without a matching start")
        self.fix_whitespace()
        self._append(self._postorder_stack.pop())

    def close(self) -> str:
        """Finish the document. lxml hands this return value back from parser.close()."""
        if self._postorder_stack:
            logger.debug("Document closed with %d element(s) still open", len(self._postorder_stack))
        return self.get_output()

    # SAX-style names for drivers that use them
    start_element = start
    end_element = end
    end_document = close

    def get_output(self) -> str:
        """
        Get the text built so far. Call after parsing is done for the finished output.

        Returns:
            The markup converted to a string suitable for speaking.
        """
        return "".join(self._output)

    def fix_whitespace(self) -> None:
        """Make sure the output ends in whitespace before another word is added."""
        if self._last_char and not _is_separator(self._last_char):
            self._append(" ")

    def _resolve_postorder_text(self, tag: str, attrs: Dict[str, str]) -> str:
        tables = self.tables

        role = attrs.get("role")
        if role is not None:
            role_text = tables.aria_role_to_description.get(role)
            if role_text is not None:
                return role_text

        input_type = attrs.get("type")
        if tag.lower() == INPUT_TAG and input_type is not None:
            # A typed input never falls back to the tag description
            return tables.input_type_to_description.get(input_type.lower(), "")

        return tables.tag_to_description.get(tag.lower(), "")

    def _append(self, text: str) -> None:
        if text:
            self._output.append(text)
            self._last_char = text[-1]

    def _check_usable(self) -> None:
        if self._failed:
            raise MarkupStreamError("Handler already reported a malformed event stream; call start_document() first")


def _is_separator(char: str) -> bool:
    return char.isspace() and char not in _NON_BREAKING_SPACES


def _is_checkable(tag: str, attrs: Dict[str, Any]) -> bool:
    tag = tag.lower()
    if tag in _UNSPOKEN_VALUE_KINDS:
        return True
    input_type = attrs.get("type")
    return tag == INPUT_TAG and input_type is not None and input_type.lower() in _UNSPOKEN_VALUE_KINDS
