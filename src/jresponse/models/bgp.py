"""
BGP route table models.

Schema for the <route-information> reply to
`show route protocol bgp` (<get-route-information>).
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, field_validator

from jresponse.codec import json as json_codec
from jresponse.codec import xml as xml_codec
from jresponse.constants import XmlRoots
from jresponse.models.common import WireModel
from jresponse.models.fields import (
    JsonOnly,
    PresenceMarker,
    XmlAttr,
    XmlNamespace,
    XmlText,
    is_present,
)


class NextHop(WireModel):
    """
    One forwarding choice for a route entry.

    <selected-next-hop/> is either present as an empty tag or absent;
    selected is None when absent and MARKER when present.

    Attributes:
        selected: Presence marker for the next hop in use
        to: Next-hop address
        via: Egress interface
        lsp_name: Label-switched path name, if the route uses one
    """

    selected: PresenceMarker = Field(default=None, alias="selected-next-hop")
    to: str | None = Field(default=None, alias="to")
    via: str | None = Field(default=None, alias="via")
    lsp_name: str | None = Field(default=None, alias="lsp-name")

    @property
    def is_selected(self) -> bool:
        """Return True if this is the selected next hop."""
        return is_present(self.selected)


class Age(WireModel):
    """
    Route age: <age seconds="585128">6d 18:32:08</age>.

    XML character data cannot tell empty text from none, so empty age
    text is stored as None.
    """

    seconds: Annotated[int | None, XmlAttr("seconds")] = Field(default=None, alias="age-seconds")
    text: Annotated[str | None, XmlText()] = Field(default=None, alias="age")

    @field_validator("text")
    @classmethod
    def empty_text_is_absent(cls, v: str | None) -> str | None:
        return v or None


class RouteEntry(WireModel):
    """
    One candidate path for a destination (<rt-entry>).

    Attributes:
        active_tag: Flag printed before the protocol ("*", "-", "#", "@" ...)
        current_active: Current-active indication
        last_active: Last-active indication
        protocol_name: Protocol that learned the route
        preference: Route preference
        age: Route age
        med: Multi-exit discriminator
        local_preference: BGP local preference
        learned_from: Peer address the route came from
        as_path: AS path string
        validation_state: Origin validation state
        next_hops: Next hops in device order
    """

    active_tag: str | None = Field(default=None, alias="active-tag")
    current_active: str | None = Field(default=None, alias="current-active")
    last_active: str | None = Field(default=None, alias="last-active")
    protocol_name: str | None = Field(default=None, alias="protocol-name")
    preference: int | None = Field(default=None, alias="preference")
    age: Age | None = Field(default=None, alias="age")
    med: int | None = Field(default=None, alias="med")
    local_preference: int | None = Field(default=None, alias="local-preference")
    learned_from: str | None = Field(default=None, alias="learned-from")
    as_path: str | None = Field(default=None, alias="as-path")
    validation_state: str | None = Field(default=None, alias="validation-state")
    next_hops: list[NextHop] = Field(default_factory=list, alias="nh")


class RouteDestination(WireModel):
    """A destination prefix and its route entries (<rt>)."""

    destination: str | None = Field(default=None, alias="rt-destination")
    entries: list[RouteEntry] = Field(default_factory=list, alias="rt-entry")


class RouteTable(WireModel):
    """Route table summary counts and destinations."""

    table_name: str | None = Field(default=None, alias="table-name")
    destination_count: int | None = Field(default=None, alias="destination-count")
    total_route_count: int | None = Field(default=None, alias="total-route-count")
    active_route_count: int | None = Field(default=None, alias="active-route-count")
    holddown_route_count: int | None = Field(default=None, alias="holddown-route-count")
    hidden_route_count: int | None = Field(default=None, alias="hidden-route-count")
    destinations: list[RouteDestination] = Field(default_factory=list, alias="rt")


class BGPRoute(WireModel):
    """
    Reply to `show route protocol bgp`.

    Attributes:
        xmlns: Namespace of the <route-information> element (XML only)
        route_table: The route table
        origin_host: Managed device that produced the reply (JSON only)
        origin_ip: Address of that device (JSON only)
    """

    xmlns: Annotated[str | None, XmlNamespace()] = Field(default=None, exclude=True)
    route_table: RouteTable | None = Field(default=None, alias="route-table")
    origin_host: Annotated[str | None, JsonOnly()] = Field(default=None, alias="originhost")
    origin_ip: Annotated[str | None, JsonOnly()] = Field(default=None, alias="originip")

    @classmethod
    def read_xml(cls, data: bytes | str) -> BGPRoute:
        """Parse a <route-information> reply."""
        record: BGPRoute = xml_codec.read_xml(cls, data, XmlRoots.ROUTE_INFORMATION)
        return record

    @classmethod
    def read_json(cls, data: bytes | str) -> BGPRoute:
        """Parse the JSON form of a route reply."""
        record: BGPRoute = json_codec.read_json(cls, data)
        return record

    def write_xml(self, pretty: bool = False) -> bytes:
        """Serialize to <route-information> XML."""
        return xml_codec.write_xml(self, XmlRoots.ROUTE_INFORMATION, pretty=pretty)

    def write_json(self, indent: int | None = None) -> bytes:
        """Serialize to JSON."""
        return json_codec.write_json(self, indent=indent)

    def write_cli_text(self) -> str:
        """Render as the device's `show route protocol bgp` console output."""
        from jresponse.formatters.cli import render_bgp_route

        return render_bgp_route(self)
