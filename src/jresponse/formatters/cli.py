"""
CLI text renderers.

Each renderer walks a populated record and fills the templates in
jresponse.constants.CliTemplates to reproduce the device's console
output. Missing optional data renders as empty text or zero lines;
only a record of the wrong family (or a template defect) is an error.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from jresponse.constants import CliTemplates
from jresponse.core.exceptions import RenderingError
from jresponse.formatters.numbers import (
    format_ms_fixed,
    format_ms_minimal,
    next_hop_indicator,
    text,
)
from jresponse.models.bgp import BGPRoute, RouteDestination, RouteEntry
from jresponse.models.ping import Ping
from jresponse.models.traceroute import Hop, TraceRoute

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")


def _lines_to_text(lines: list[str]) -> str:
    """Join lines, terminating each with a newline."""
    return "".join(f"{line}\n" for line in lines)


def _render(
    renderer: str,
    record: Any,
    expected: type[RecordT],
    build: Callable[[RecordT], list[str]],
) -> str:
    if not isinstance(record, expected):
        raise RenderingError(
            renderer, f"expected {expected.__name__}, got {type(record).__name__}"
        )

    try:
        lines = build(record)
    except (KeyError, IndexError, TypeError, ValueError, AttributeError) as e:
        raise RenderingError(renderer, str(e)) from e

    logger.debug(f"Rendered {renderer} output: {len(lines)} lines")
    return _lines_to_text(lines)


# =============================================================================
# Ping
# =============================================================================


def _ping_lines(ping: Ping) -> list[str]:
    lines = [
        CliTemplates.PING_HEADER.format(
            target_host=text(ping.target_host),
            target_ip=text(ping.target_ip),
            packet_size=text(ping.packet_size),
        )
    ]
    for probe in ping.probe_results:
        lines.append(
            CliTemplates.PING_PROBE.format(
                response_size=text(probe.response_size),
                ip_address=text(probe.ip_address),
                sequence_number=text(probe.sequence_number),
                time_to_live=text(probe.time_to_live),
                rtt=format_ms_fixed(probe.rtt),
            )
        )
    return lines


def render_ping(ping: Ping) -> str:
    """
    Render a ping reply as console text.

    Output format:
        PING 8.8.8.8 (8.8.8.8): 1200 data bytes
        1208 bytes from 8.8.8.8: icmp_seq=0 ttl=62 time=0.690 ms

    Args:
        ping: Populated ping record

    Returns:
        Console text, one line per probe after the header

    Raises:
        RenderingError: If the record is not a Ping
    """
    return _render("ping", ping, Ping, _ping_lines)


# =============================================================================
# Traceroute
# =============================================================================


def _hop_line(hop: Hop) -> str:
    line = CliTemplates.TRACEROUTE_HOP.format(
        ttl_value=text(hop.ttl_value),
        last_host_name=hop.trimmed_last_host_name,
        last_ip_address=text(hop.last_ip_address),
    )
    probes = "".join(
        CliTemplates.TRACEROUTE_PROBE.format(rtt=format_ms_minimal(probe.rtt))
        for probe in hop.probe_results
    )
    return line + probes


def _traceroute_lines(traceroute: TraceRoute) -> list[str]:
    lines = [
        CliTemplates.TRACEROUTE_HEADER.format(
            target_host=text(traceroute.target_host),
            target_ip=text(traceroute.target_ip),
            max_hop_index=text(traceroute.max_hop_index),
            packet_size=text(traceroute.packet_size),
        )
    ]
    lines.extend(_hop_line(hop) for hop in traceroute.hops)
    return lines


def render_traceroute(traceroute: TraceRoute) -> str:
    """
    Render a traceroute reply as console text.

    Output format:
        traceroute to 8.8.8.8 (8.8.8.8), 30 hops max, 40 byte packets
         1  10.226.0.1 (10.226.0.1)  13.876 ms  11.752 ms  10.973 ms

    Args:
        traceroute: Populated traceroute record

    Returns:
        Console text, one line per hop after the header

    Raises:
        RenderingError: If the record is not a TraceRoute
    """
    return _render("traceroute", traceroute, TraceRoute, _traceroute_lines)


# =============================================================================
# show route protocol bgp
# =============================================================================


def _entry_lines(entry: RouteEntry) -> list[str]:
    lines = [
        CliTemplates.BGP_ENTRY.format(
            active_tag=text(entry.active_tag),
            protocol_name=text(entry.protocol_name),
            preference=text(entry.preference),
            age=text(entry.age.text if entry.age else None),
            med=text(entry.med),
            local_preference=text(entry.local_preference),
            learned_from=text(entry.learned_from),
        ),
        CliTemplates.BGP_AS_PATH.format(
            as_path=text(entry.as_path),
            validation_state=text(entry.validation_state),
        ),
    ]
    for nh in entry.next_hops:
        line = CliTemplates.BGP_NEXT_HOP.format(
            indicator=next_hop_indicator(nh.selected),
            to=text(nh.to),
            via=text(nh.via),
        )
        if nh.lsp_name:
            line += CliTemplates.BGP_LSP_SUFFIX.format(lsp_name=nh.lsp_name)
        lines.append(line)
    return lines


def _destination_lines(rt: RouteDestination) -> list[str]:
    destination = text(rt.destination)
    if not rt.entries:
        return [destination]

    lines: list[str] = []
    for i, entry in enumerate(rt.entries):
        entry_lines = _entry_lines(entry)
        if i == 0:
            entry_lines[0] = destination + CliTemplates.BGP_FIRST_ENTRY_INDENT + entry_lines[0]
        else:
            entry_lines[0] = CliTemplates.BGP_ENTRY_INDENT + entry_lines[0]
        lines.extend(entry_lines)
    return lines


def _bgp_lines(bgp_route: BGPRoute) -> list[str]:
    table = bgp_route.route_table
    lines = [
        CliTemplates.BGP_HEADER.format(
            table_name=text(table.table_name if table else None),
            destination_count=text(table.destination_count if table else None),
            total_route_count=text(table.total_route_count if table else None),
            active_route_count=text(table.active_route_count if table else None),
            holddown_route_count=text(table.holddown_route_count if table else None),
            hidden_route_count=text(table.hidden_route_count if table else None),
        ),
        *CliTemplates.BGP_LEGEND,
        "",
    ]
    if table:
        for rt in table.destinations:
            lines.extend(_destination_lines(rt))
    return lines


def render_bgp_route(bgp_route: BGPRoute) -> str:
    """
    Render a BGP route table reply as console text.

    Output format:
        inet.0: 565525 destinations, 4400004 routes (565520 active, 0 holddown, 14 hidden)
        @ = Routing Use Only, # = Forwarding Use Only
        + = Active Route, - = Last Active, * = Both

        8.8.8.0/24      *[BGP/170] 6d 18:32:08, MED 0, localpref 130, from 206.126.239.251
                          AS path: 15169 I, validation-state: unverified
                        > to 206.126.236.21 via ae0.0

    The first entry of a destination follows the prefix after six
    spaces; later entries are indented sixteen spaces. Next hops are
    flagged '>' when selected and carry a label-switched-path suffix
    only when an LSP name is set.

    Args:
        bgp_route: Populated BGP route record

    Returns:
        Console text

    Raises:
        RenderingError: If the record is not a BGPRoute
    """
    return _render("bgp-route", bgp_route, BGPRoute, _bgp_lines)
