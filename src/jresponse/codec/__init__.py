"""
XML and JSON codecs for jresponse records.
"""

from __future__ import annotations

from jresponse.codec.json import read_json, write_json
from jresponse.codec.xml import normalize_newlines, parse_xml, read_xml, write_xml

__all__ = [
    "read_xml",
    "write_xml",
    "read_json",
    "write_json",
    "parse_xml",
    "normalize_newlines",
]
