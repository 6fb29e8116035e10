"""
Pydantic record models for jresponse.

Contains the schemas of the supported RPC replies:
- Ping: <ping-results>
- TraceRoute: <traceroute-results>
- BGPRoute: <route-information>
"""

from __future__ import annotations

from jresponse.models.bgp import Age, BGPRoute, NextHop, RouteDestination, RouteEntry, RouteTable
from jresponse.models.common import RPCError
from jresponse.models.fields import MARKER, PresenceMarker, is_present
from jresponse.models.ping import Ping, ProbeResult, ProbeResultsSummary
from jresponse.models.registry import RECORD_TYPES, read_any_xml, record_type_for_root
from jresponse.models.traceroute import Hop, TraceRoute, TraceRouteProbeResult

__all__ = [
    # Presence markers
    "MARKER",
    "PresenceMarker",
    "is_present",
    # Shared
    "RPCError",
    # Ping
    "Ping",
    "ProbeResult",
    "ProbeResultsSummary",
    # Traceroute
    "TraceRoute",
    "Hop",
    "TraceRouteProbeResult",
    # BGP
    "BGPRoute",
    "RouteTable",
    "RouteDestination",
    "RouteEntry",
    "Age",
    "NextHop",
    # Lookup
    "RECORD_TYPES",
    "record_type_for_root",
    "read_any_xml",
]
