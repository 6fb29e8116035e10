"""
Traceroute reply models.

Schema for the <traceroute-results> reply to the Junos <traceroute> RPC.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

from jresponse.codec import json as json_codec
from jresponse.codec import xml as xml_codec
from jresponse.constants import XmlRoots
from jresponse.models.common import RPCError, WireModel
from jresponse.models.fields import JsonOnly, PresenceMarker, XmlAttr, XmlNamespace


class TraceRouteProbeResult(WireModel):
    """A single probe sent at one TTL; rtt in microseconds."""

    date_determined: Annotated[int | None, XmlAttr("date-determined")] = Field(
        default=None, alias="date-determined"
    )
    probe_index: int | None = Field(default=None, alias="probe-index")
    ip_address: str | None = Field(default=None, alias="ip-address")
    host_name: str | None = Field(default=None, alias="host-name")
    probe_success: PresenceMarker = Field(default=None, alias="probe-success")
    probe_failure: PresenceMarker = Field(default=None, alias="probe-failure")
    probe_reached: str | None = Field(default=None, alias="probe-reached")
    rtt: int | None = Field(default=None, alias="rtt")


class Hop(WireModel):
    """
    One TTL step along the path.

    The device pads last_host_name with whitespace; it is stored as
    received and trimmed only when rendering.
    """

    ttl_value: int | None = Field(default=None, alias="ttl-value")
    last_ip_address: str | None = Field(default=None, alias="last-ip-address")
    last_host_name: str | None = Field(default=None, alias="last-host-name")
    probe_results: list[TraceRouteProbeResult] = Field(default_factory=list, alias="probe-result")

    @property
    def trimmed_last_host_name(self) -> str:
        """Return last_host_name without surrounding whitespace."""
        return (self.last_host_name or "").strip()


class TraceRoute(WireModel):
    """
    Reply to a traceroute RPC.

    Attributes:
        xmlns: Namespace of the <traceroute-results> element (XML only)
        target_host: Host name traced
        target_ip: Resolved target address
        max_hop_index: Maximum TTL probed
        packet_size: Probe size in bytes
        hops: Hops in TTL order
        errors: RPC errors reported by the device
        traceroute_failure: Failure message when the trace could not run
        origin_host: Managed device that produced the reply (JSON only)
        origin_ip: Address of that device (JSON only)
    """

    xmlns: Annotated[str | None, XmlNamespace()] = Field(default=None, exclude=True)
    target_host: str | None = Field(default=None, alias="target-host")
    target_ip: str | None = Field(default=None, alias="target-ip")
    max_hop_index: int | None = Field(default=None, alias="max-hop-index")
    packet_size: int | None = Field(default=None, alias="packet-size")
    hops: list[Hop] = Field(default_factory=list, alias="hop")
    errors: list[RPCError] = Field(default_factory=list, alias="rpc-error")
    traceroute_failure: str | None = Field(default=None, alias="traceroute-failure")
    origin_host: Annotated[str | None, JsonOnly()] = Field(default=None, alias="originhost")
    origin_ip: Annotated[str | None, JsonOnly()] = Field(default=None, alias="originip")

    @classmethod
    def read_xml(cls, data: bytes | str) -> TraceRoute:
        """Parse a <traceroute-results> reply."""
        record: TraceRoute = xml_codec.read_xml(cls, data, XmlRoots.TRACEROUTE)
        return record

    @classmethod
    def read_json(cls, data: bytes | str) -> TraceRoute:
        """Parse the JSON form of a traceroute reply."""
        record: TraceRoute = json_codec.read_json(cls, data)
        return record

    def write_xml(self, pretty: bool = False) -> bytes:
        """Serialize to <traceroute-results> XML."""
        return xml_codec.write_xml(self, XmlRoots.TRACEROUTE, pretty=pretty)

    def write_json(self, indent: int | None = None) -> bytes:
        """Serialize to JSON."""
        return json_codec.write_json(self, indent=indent)

    def write_cli_text(self) -> str:
        """Render as the device's traceroute console output."""
        from jresponse.formatters.cli import render_traceroute

        return render_traceroute(self)
