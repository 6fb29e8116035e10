"""
Pytest fixtures shared by all jresponse tests.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from jresponse.core.config import reset_settings
from jresponse.models import (
    Age,
    BGPRoute,
    Hop,
    NextHop,
    Ping,
    ProbeResult,
    ProbeResultsSummary,
    RouteDestination,
    RouteEntry,
    RouteTable,
    TraceRoute,
    TraceRouteProbeResult,
)
from jresponse.models.fields import MARKER

# Path to test fixtures
FIXTURES_DIR = Path(__file__).parent / "fixtures"

PING_NAMESPACE = "http://xml.juniper.net/junos/12.3R7/junos-probe-tests"
TRACEROUTE_NAMESPACE = "http://xml.juniper.net/junos/12.1X46/junos-probe-tests"
ROUTE_NAMESPACE = "http://xml.juniper.net/junos/12.3R6/junos-routing"

LSP_PREFIX = "VAASHBPO1EDGJ01>>OHIOLAHUHEDGJ01-ECMP"


def read_fixture(name: str) -> bytes:
    """Read a fixture file as raw bytes."""
    return (FIXTURES_DIR / name).read_bytes()


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run every test with default settings and no JRESP_* overrides."""
    for var in ("DEBUG", "LOG_LEVEL", "DEFAULT_FORMAT", "JSON_INDENT", "XML_PRETTY_PRINT"):
        monkeypatch.delenv(f"JRESP_{var}", raising=False)
    reset_settings()
    yield
    reset_settings()


# =============================================================================
# Ping
# =============================================================================


@pytest.fixture
def ping_xml() -> bytes:
    return read_fixture("ping_8.8.8.8.xml")


@pytest.fixture
def ping_json() -> bytes:
    return read_fixture("ping_8.8.8.8.json")


@pytest.fixture
def ping_cli() -> str:
    return read_fixture("ping_8.8.8.8.cli").decode("utf-8")


@pytest.fixture
def expected_ping() -> Ping:
    """The ping reply held by ping_8.8.8.8.xml."""
    rtts = [690, 644, 681, 645, 686]
    return Ping(
        xmlns=PING_NAMESPACE,
        target_host="8.8.8.8",
        target_ip="8.8.8.8",
        packet_size=1200,
        probe_results=[
            ProbeResult(
                date_determined=1447350764 + i,
                probe_index=i + 1,
                probe_success=MARKER,
                sequence_number=i,
                ip_address="8.8.8.8",
                time_to_live=62,
                response_size=1208,
                rtt=rtt,
            )
            for i, rtt in enumerate(rtts)
        ],
        summary=ProbeResultsSummary(
            probes_sent=5,
            responses_received=5,
            packet_loss=0,
            rtt_minimum=644,
            rtt_maximum=690,
            rtt_average=669,
            rtt_stddev=20,
        ),
    )


# =============================================================================
# Traceroute
# =============================================================================


def _probes(
    ip: str, host: str, date: int, rtts: list[int]
) -> list[TraceRouteProbeResult]:
    return [
        TraceRouteProbeResult(
            date_determined=date,
            probe_index=i + 1,
            ip_address=ip,
            host_name=host,
            rtt=rtt,
            probe_success=MARKER,
        )
        for i, rtt in enumerate(rtts)
    ]


@pytest.fixture
def traceroute_xml() -> bytes:
    return read_fixture("traceroute_8.8.8.8.xml")


@pytest.fixture
def traceroute_json() -> bytes:
    return read_fixture("traceroute_8.8.8.8.json")


@pytest.fixture
def expected_traceroute() -> TraceRoute:
    """The traceroute reply held by traceroute_8.8.8.8.xml."""
    return TraceRoute(
        xmlns=TRACEROUTE_NAMESPACE,
        target_host="8.8.8.8",
        target_ip="8.8.8.8",
        max_hop_index=30,
        packet_size=40,
        hops=[
            Hop(
                ttl_value=1,
                last_ip_address="10.226.0.1",
                last_host_name="10.226.0.1",
                probe_results=_probes(
                    "10.226.0.1", "10.226.0.1", 1439961690, [13876, 11752, 10973]
                ),
            ),
            Hop(
                ttl_value=2,
                last_ip_address="192.0.2.9",
                last_host_name="  xe-0-0-0.core1.example.net",
                probe_results=_probes(
                    "192.0.2.9", "xe-0-0-0.core1.example.net", 1439961691, [12850, 4635, 10000]
                ),
            ),
        ],
    )


@pytest.fixture
def traceroute_cli() -> str:
    """Console output for traceroute_8.8.8.8.xml; every hop line ends in two spaces."""
    return (
        "traceroute to 8.8.8.8 (8.8.8.8), 30 hops max, 40 byte packets\n"
        " 1  10.226.0.1 (10.226.0.1)  13.876 ms  11.752 ms  10.973 ms  \n"
        " 2  xe-0-0-0.core1.example.net (192.0.2.9)  12.85 ms  4.635 ms  10 ms  \n"
    )


# =============================================================================
# BGP
# =============================================================================


def _bgp_entry(
    learned_from: str,
    seconds: int,
    age: str,
    next_hops: list[NextHop],
    active: bool = False,
) -> RouteEntry:
    return RouteEntry(
        active_tag="*" if active else None,
        current_active=MARKER if active else None,
        last_active=MARKER if active else None,
        protocol_name="BGP",
        preference=170,
        age=Age(seconds=seconds, text=age),
        med=0,
        local_preference=130,
        learned_from=learned_from,
        as_path="15169 I",
        validation_state="unverified",
        next_hops=next_hops,
    )


@pytest.fixture
def bgp_xml() -> bytes:
    return read_fixture("show_route_protocol_bgp.xml")


@pytest.fixture
def bgp_json() -> bytes:
    return read_fixture("show_route_protocol_bgp.json")


@pytest.fixture
def bgp_cli() -> str:
    return read_fixture("show_route_protocol_bgp.cli").decode("utf-8")


@pytest.fixture
def expected_bgp_route() -> BGPRoute:
    """The route table held by show_route_protocol_bgp.xml."""
    direct = [NextHop(selected=MARKER, to="206.126.236.21", via="ae0.0")]
    ecmp = [
        NextHop(
            selected=MARKER if (to, n) == ("24.236.73.12", 2) else None,
            to=to,
            via=via,
            lsp_name=f"{LSP_PREFIX}{n}",
        )
        for to, via in (("24.236.73.12", "ae5.0"), ("69.73.0.136", "ae4.0"))
        for n in (1, 2, 3)
    ]
    return BGPRoute(
        xmlns=ROUTE_NAMESPACE,
        route_table=RouteTable(
            table_name="inet.0",
            destination_count=565525,
            total_route_count=4400004,
            active_route_count=565520,
            holddown_route_count=0,
            hidden_route_count=14,
            destinations=[
                RouteDestination(
                    destination="8.8.8.0/24",
                    entries=[
                        _bgp_entry("206.126.239.251", 585128, "6d 18:32:08", direct, active=True),
                        _bgp_entry("206.126.239.252", 585128, "6d 18:32:08", direct),
                        _bgp_entry("76.73.165.1", 762247, "1w1d 19:44:07", ecmp),
                    ],
                )
            ],
        ),
    )
