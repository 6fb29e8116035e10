"""
Wire-mapping markers for record fields.

Record fields are plain pydantic fields whose alias is the kebab-case
name shared by the XML element and the JSON key. The markers below are
attached through typing.Annotated and tell the XML codec when a field
is not a child element.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Final


@dataclass(frozen=True)
class XmlAttr:
    """Field is an attribute of the enclosing element, matched by local name."""

    name: str


@dataclass(frozen=True)
class XmlText:
    """Field is the character data of the enclosing element."""


@dataclass(frozen=True)
class XmlInnerMarkup:
    """Field holds the raw inner markup of a child element as text."""


@dataclass(frozen=True)
class JsonOnly:
    """Field is populated by the embedding system and never appears in XML."""


@dataclass(frozen=True)
class XmlNamespace:
    """Field holds the root element namespace and never appears in JSON."""


@dataclass(frozen=True)
class Presence:
    """
    Field carries meaning only through its presence.

    None means the tag is absent. Any string, normally MARKER, means the
    tag is present; the content is kept but never inspected.
    """


# Shared placeholder for a present-and-empty tag
MARKER: Final[str] = ""

PresenceMarker = Annotated[str | None, Presence()]


def is_present(marker: str | None) -> bool:
    """Return True if a presence marker is set."""
    return marker is not None
