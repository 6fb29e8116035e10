"""
Ping reply models.

Schema for the <ping-results> reply to the Junos <ping> RPC.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

from jresponse.codec import json as json_codec
from jresponse.codec import xml as xml_codec
from jresponse.constants import XmlRoots
from jresponse.models.common import RPCError, WireModel
from jresponse.models.fields import JsonOnly, PresenceMarker, XmlAttr, XmlNamespace


class ProbeResult(WireModel):
    """
    A single ICMP echo attempt.

    Attributes:
        date_determined: Epoch seconds the result was recorded (XML attribute)
        probe_index: 1-based probe number
        probe_success: Presence marker, set when a reply was received
        probe_failure: Presence marker, set when the probe failed
        sequence_number: ICMP sequence number
        ip_address: Address that replied
        time_to_live: TTL of the reply
        response_size: Reply size in bytes
        probe_reached: Reached-target indication
        rtt: Round-trip time in microseconds
    """

    date_determined: Annotated[int | None, XmlAttr("date-determined")] = Field(
        default=None, alias="date-determined"
    )
    probe_index: int | None = Field(default=None, alias="probe-index")
    probe_success: PresenceMarker = Field(default=None, alias="probe-success")
    probe_failure: PresenceMarker = Field(default=None, alias="probe-failure")
    sequence_number: int | None = Field(default=None, alias="sequence-number")
    ip_address: str | None = Field(default=None, alias="ip-address")
    time_to_live: int | None = Field(default=None, alias="time-to-live")
    response_size: int | None = Field(default=None, alias="response-size")
    probe_reached: str | None = Field(default=None, alias="probe-reached")
    rtt: int | None = Field(default=None, alias="rtt")


class ProbeResultsSummary(WireModel):
    """Ping statistics; RTT values in microseconds."""

    probes_sent: int | None = Field(default=None, alias="probes-sent")
    responses_received: int | None = Field(default=None, alias="responses-received")
    packet_loss: int | None = Field(default=None, alias="packet-loss")
    rtt_minimum: int | None = Field(default=None, alias="rtt-minimum")
    rtt_maximum: int | None = Field(default=None, alias="rtt-maximum")
    rtt_average: int | None = Field(default=None, alias="rtt-average")
    rtt_stddev: int | None = Field(default=None, alias="rtt-stddev")


class Ping(WireModel):
    """
    Reply to a ping RPC.

    Attributes:
        xmlns: Namespace of the <ping-results> element (XML only)
        target_host: Host name pinged
        target_ip: Resolved target address
        packet_size: ICMP payload size in bytes
        probe_results: Probe results in the order sent
        summary: Ping statistics
        errors: RPC errors reported by the device
        origin_host: Managed device that produced the reply (JSON only)
        origin_ip: Address of that device (JSON only)
    """

    xmlns: Annotated[str | None, XmlNamespace()] = Field(default=None, exclude=True)
    target_host: str | None = Field(default=None, alias="target-host")
    target_ip: str | None = Field(default=None, alias="target-ip")
    packet_size: int | None = Field(default=None, alias="packet-size")
    probe_results: list[ProbeResult] = Field(default_factory=list, alias="probe-result")
    summary: ProbeResultsSummary | None = Field(default=None, alias="probe-results-summary")
    errors: list[RPCError] = Field(default_factory=list, alias="rpc-error")
    origin_host: Annotated[str | None, JsonOnly()] = Field(default=None, alias="originhost")
    origin_ip: Annotated[str | None, JsonOnly()] = Field(default=None, alias="originip")

    @classmethod
    def read_xml(cls, data: bytes | str) -> Ping:
        """Parse a <ping-results> reply."""
        record: Ping = xml_codec.read_xml(cls, data, XmlRoots.PING)
        return record

    @classmethod
    def read_json(cls, data: bytes | str) -> Ping:
        """Parse the JSON form of a ping reply."""
        record: Ping = json_codec.read_json(cls, data)
        return record

    def write_xml(self, pretty: bool = False) -> bytes:
        """Serialize to <ping-results> XML."""
        return xml_codec.write_xml(self, XmlRoots.PING, pretty=pretty)

    def write_json(self, indent: int | None = None) -> bytes:
        """Serialize to JSON."""
        return json_codec.write_json(self, indent=indent)

    def write_cli_text(self) -> str:
        """Render as the device's ping console output."""
        from jresponse.formatters.cli import render_ping

        return render_ping(self)
