"""
Constants, XML root elements and CLI templates for jresponse.

This module provides centralized definitions for:
- XML root elements of each supported RPC reply
- Output format names
- CLI text templates, one set per record family
"""

from __future__ import annotations

import re
from typing import Final

# =============================================================================
# XML Configuration
# =============================================================================


class XmlRoots:
    """Root element local names of the supported RPC replies."""

    PING: Final[str] = "ping-results"
    TRACEROUTE: Final[str] = "traceroute-results"
    ROUTE_INFORMATION: Final[str] = "route-information"


class Patterns:
    """Compiled regex patterns for common operations."""

    # Newline characters stripped from device XML before parsing
    NEWLINES: Final[re.Pattern[bytes]] = re.compile(rb"[\r\n]")


# =============================================================================
# Output Format Constants
# =============================================================================


class OutputFormat:
    """Output format names accepted by the output helpers."""

    XML: Final[str] = "xml"
    JSON: Final[str] = "json"
    CLI: Final[str] = "cli"

    ALL: Final[tuple[str, ...]] = (XML, JSON, CLI)


# =============================================================================
# CLI Templates
# =============================================================================


class CliTemplates:
    """
    Text templates reproducing the Junos console output.

    Each template is a str.format() pattern filled by the renderers in
    jresponse.formatters.cli. Templates end without a newline; the
    renderers add line breaks.
    """

    # ping
    PING_HEADER: Final[str] = "PING {target_host} ({target_ip}): {packet_size} data bytes"
    PING_PROBE: Final[str] = (
        "{response_size} bytes from {ip_address}: "
        "icmp_seq={sequence_number} ttl={time_to_live} time={rtt} ms"
    )

    # traceroute
    TRACEROUTE_HEADER: Final[str] = (
        "traceroute to {target_host} ({target_ip}), "
        "{max_hop_index} hops max, {packet_size} byte packets"
    )
    TRACEROUTE_HOP: Final[str] = " {ttl_value}  {last_host_name} ({last_ip_address})  "
    TRACEROUTE_PROBE: Final[str] = "{rtt} ms  "

    # show route protocol bgp
    BGP_HEADER: Final[str] = (
        "{table_name}: {destination_count} destinations, {total_route_count} routes "
        "({active_route_count} active, {holddown_route_count} holddown, "
        "{hidden_route_count} hidden)"
    )
    BGP_LEGEND: Final[tuple[str, ...]] = (
        "@ = Routing Use Only, # = Forwarding Use Only",
        "+ = Active Route, - = Last Active, * = Both",
    )
    BGP_FIRST_ENTRY_INDENT: Final[str] = " " * 6
    BGP_ENTRY_INDENT: Final[str] = " " * 16
    BGP_ENTRY: Final[str] = (
        "{active_tag}[{protocol_name}/{preference}] {age}, "
        "MED {med}, localpref {local_preference}, from {learned_from}"
    )
    BGP_AS_PATH: Final[str] = (
        "                  AS path: {as_path}, validation-state: {validation_state}"
    )
    BGP_NEXT_HOP: Final[str] = "                {indicator} to {to} via {via}"
    BGP_LSP_SUFFIX: Final[str] = ", label-switched-path {lsp_name}"

    # next-hop indicator
    SELECTED_NEXT_HOP: Final[str] = ">"
    OTHER_NEXT_HOP: Final[str] = " "
