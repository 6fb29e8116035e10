"""
Output formatters for jresponse.

Provides CLI text renderers for each record family and an
output helper that writes any record in XML, JSON or CLI text.
"""

from __future__ import annotations

from jresponse.formatters.cli import render_bgp_route, render_ping, render_traceroute
from jresponse.formatters.numbers import format_ms_fixed, format_ms_minimal, next_hop_indicator
from jresponse.formatters.output import OutputFormatter, write_record

__all__ = [
    "render_ping",
    "render_traceroute",
    "render_bgp_route",
    "format_ms_fixed",
    "format_ms_minimal",
    "next_hop_indicator",
    "OutputFormatter",
    "write_record",
]
