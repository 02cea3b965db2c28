"""
Description tables: HTML input types, ARIA roles and tags mapped to spoken phrases.
"""
import json
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

TABLE_KEYS = ("input_types", "aria_roles", "tags")

DEFAULT_INPUT_TYPES = {
    "button": "button",
    "checkbox": "check box",
    "color": "color picker",
    "date": "date picker",
    "email": "email edit text",
    "file": "file upload button",
    "image": "image button",
    "number": "number edit text",
    "password": "password edit text",
    "radio": "radio button",
    "range": "slider",
    "reset": "reset button",
    "search": "search edit text",
    "submit": "submit button",
    "tel": "phone number edit text",
    "text": "edit text",
    "url": "web address edit text",
}

DEFAULT_ARIA_ROLES = {
    "alert": "alert",
    "button": "button",
    "checkbox": "check box",
    "combobox": "combo box",
    "dialog": "dialog",
    "grid": "grid",
    "heading": "heading",
    "img": "image",
    "link": "link",
    "list": "list",
    "listbox": "list box",
    "listitem": "list item",
    "menu": "menu",
    "menubar": "menu bar",
    "menuitem": "menu item",
    "navigation": "navigation",
    "option": "option",
    "progressbar": "progress bar",
    "radio": "radio button",
    "scrollbar": "scroll bar",
    "search": "search",
    "slider": "slider",
    "spinbutton": "spin button",
    "tab": "tab",
    "tablist": "tab list",
    "tabpanel": "tab panel",
    "textbox": "edit text",
    "toolbar": "tool bar",
    "tree": "tree",
    "treeitem": "tree item",
}

DEFAULT_TAGS = {
    "a": "link",
    "button": "button",
    "h1": "heading one",
    "h2": "heading two",
    "h3": "heading three",
    "h4": "heading four",
    "h5": "heading five",
    "h6": "heading six",
    "img": "image",
    "li": "list item",
    "ol": "list",
    "select": "combo box",
    "table": "table",
    "textarea": "edit text",
    "ul": "list",
}


class TablesFormatError(ValueError):
    """A description tables file is not shaped as expected."""


class DescriptionTables:
    """
    Read-only lookup tables used to describe elements.

    Input type and tag keys are matched case-insensitively, so they are
    stored lower-cased. ARIA role keys are matched exactly.
    """

    _default = None

    def __init__(self,
                 input_types: Optional[Mapping[str, str]] = None,
                 aria_roles: Optional[Mapping[str, str]] = None,
                 tags: Optional[Mapping[str, str]] = None):
        self.input_type_to_description = MappingProxyType(
            {key.lower(): value for key, value in (input_types or {}).items()}
        )
        self.aria_role_to_description = MappingProxyType(dict(aria_roles or {}))
        self.tag_to_description = MappingProxyType(
            {key.lower(): value for key, value in (tags or {}).items()}
        )

    @classmethod
    def empty(cls) -> "DescriptionTables":
        return cls()

    @classmethod
    def default(cls) -> "DescriptionTables":
        """Built-in English tables. The same instance is shared by every caller."""
        if cls._default is None:
            cls._default = cls(DEFAULT_INPUT_TYPES, DEFAULT_ARIA_ROLES, DEFAULT_TAGS)
        return cls._default

    def merged(self, overrides: Mapping[str, Mapping[str, str]]) -> "DescriptionTables":
        """
        Return new tables with ``overrides`` layered on top of these.

        Args:
            overrides: Dict with any of the keys "input_types", "aria_roles", "tags"
        """
        current = self.to_dict()
        for key in TABLE_KEYS:
            current[key].update(overrides.get(key) or {})
        return DescriptionTables(current["input_types"], current["aria_roles"], current["tags"])

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        return {
            "input_types": dict(self.input_type_to_description),
            "aria_roles": dict(self.aria_role_to_description),
            "tags": dict(self.tag_to_description),
        }

    def __repr__(self):
        return (f"DescriptionTables(input_types={len(self.input_type_to_description)}, "
                f"aria_roles={len(self.aria_role_to_description)}, "
                f"tags={len(self.tag_to_description)})")


def load_tables(path: str, base: Optional[DescriptionTables] = None) -> DescriptionTables:
    """
    Load description overrides from a JSON file.

    The file holds an object with optional "input_types", "aria_roles" and
    "tags" keys, each an object of strings. Entries replace those in ``base``.

    Args:
        path: Path to the JSON file
        base: Tables to merge onto (built-in defaults if not given)

    Returns:
        The merged tables
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise TablesFormatError(f"Invalid JSON in {path}: {e}") from e

    _validate(raw, Path(path).name)
    if base is None:
        base = DescriptionTables.default()
    return base.merged(raw)


def _validate(raw: Any, source: str) -> None:
    if not isinstance(raw, dict):
        raise TablesFormatError(f"{source}: expected a JSON object at the top level")

    unknown = set(raw) - set(TABLE_KEYS)
    if unknown:
        raise TablesFormatError(f"{source}: unknown table(s) {', '.join(sorted(unknown))}")

    for key in TABLE_KEYS:
        table = raw.get(key, {})
        if not isinstance(table, dict):
            raise TablesFormatError(f"{source}: '{key}' must be an object")
        for name, phrase in table.items():
            if not isinstance(phrase, str):
                raise TablesFormatError(f"{source}: '{key}.{name}' must be a string")
