"""
Output formatter for converted RPC replies.

Writes any Producible record to a stream in XML, JSON or CLI text.
The whole output is rendered before anything is written, so a failed
render never leaves a partial record in the stream.
"""

from __future__ import annotations

import sys
from typing import BinaryIO, TextIO

from jresponse.constants import OutputFormat
from jresponse.core.config import get_settings
from jresponse.core.exceptions import ConfigurationError
from jresponse.protocols import Producible


class OutputFormatter:
    """
    Formatter for record output.

    Attributes:
        output: Output stream (defaults to stdout)
        fmt: Output format: xml, json or cli
        json_indent: JSON indentation (None for compact)
        xml_pretty_print: Indent XML output
        debug: Enable debug output
    """

    def __init__(
        self,
        output: TextIO | None = None,
        fmt: str | None = None,
        json_indent: int | None = None,
        xml_pretty_print: bool | None = None,
        debug: bool | None = None,
    ):
        """
        Initialize output formatter.

        Unset arguments fall back to the JRESP_* settings.

        Args:
            output: Output stream (defaults to stdout)
            fmt: Output format: xml, json or cli
            json_indent: JSON indentation (None for compact)
            xml_pretty_print: Indent XML output
            debug: Enable debug output

        Raises:
            ConfigurationError: If fmt is not a known format
        """
        settings = get_settings()
        self.output = output or sys.stdout
        self.fmt = (fmt or settings.default_format).lower()
        self.json_indent = json_indent if json_indent is not None else settings.json_indent
        self.xml_pretty_print = (
            xml_pretty_print if xml_pretty_print is not None else settings.xml_pretty_print
        )
        self.debug = debug if debug is not None else settings.debug

        if self.fmt not in OutputFormat.ALL:
            raise ConfigurationError(
                f"Unknown output format: {self.fmt}",
                context={"choices": list(OutputFormat.ALL)},
            )

    def _debug_print(self, message: str) -> None:
        """Print debug message to stderr."""
        if self.debug:
            print(f"DEBUG [OutputFormatter]: {message}", file=sys.stderr)

    def format(self, record: Producible) -> str:
        """
        Render a record in the configured format.

        Args:
            record: Any Producible record

        Returns:
            Complete output text
        """
        if self.fmt == OutputFormat.XML:
            return record.write_xml(pretty=self.xml_pretty_print).decode("utf-8")
        if self.fmt == OutputFormat.JSON:
            return record.write_json(indent=self.json_indent).decode("utf-8")
        return record.write_cli_text()

    def write(self, record: Producible) -> None:
        """
        Render a record and write it to the output stream.

        Args:
            record: Any Producible record
        """
        output_str = self.format(record)
        self._debug_print(f"Writing {len(output_str)} chars of {self.fmt} output")

        self.output.write(output_str)
        if output_str and not output_str.endswith("\n"):
            self.output.write("\n")
        self.output.flush()


def write_record(record: Producible, stream: BinaryIO, fmt: str = OutputFormat.CLI) -> int:
    """
    Write a record to a binary stream.

    Args:
        record: Any Producible record
        stream: Binary sink
        fmt: Output format: xml, json or cli

    Returns:
        Number of bytes written

    Raises:
        ConfigurationError: If fmt is not a known format
    """
    if fmt == OutputFormat.XML:
        data = record.write_xml()
    elif fmt == OutputFormat.JSON:
        data = record.write_json()
    elif fmt == OutputFormat.CLI:
        data = record.write_cli_text().encode("utf-8")
    else:
        raise ConfigurationError(
            f"Unknown output format: {fmt}", context={"choices": list(OutputFormat.ALL)}
        )

    return stream.write(data)
