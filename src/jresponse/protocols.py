"""
Capability protocols shared by all record families.

Ping, TraceRoute and BGPRoute have no common domain base class; they
satisfy these protocols structurally, so generic tooling can convert
whatever record it is handed without knowing its family.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Producible(Protocol):
    """A record that can be written as XML, JSON or CLI text."""

    def write_xml(self, pretty: bool = False) -> bytes:
        """Serialize to the device XML format."""
        ...

    def write_json(self, indent: int | None = None) -> bytes:
        """Serialize to JSON."""
        ...

    def write_cli_text(self) -> str:
        """Render as the device's console output."""
        ...


@runtime_checkable
class Consumable(Protocol):
    """A record class that can be read from XML or JSON."""

    @classmethod
    def read_xml(cls, data: bytes | str) -> Any:
        """Parse the device XML format into a fresh record."""
        ...

    @classmethod
    def read_json(cls, data: bytes | str) -> Any:
        """Parse JSON into a fresh record."""
        ...


@runtime_checkable
class ResponseReaderWriter(Producible, Consumable, Protocol):
    """A record family supporting all five conversions."""
