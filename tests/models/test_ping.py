"""
Tests for ping reply models.
"""

from __future__ import annotations

import json

import pytest

from jresponse.core.exceptions import JSONParsingError, XMLParsingError
from jresponse.models import Ping, ProbeResult
from jresponse.models.fields import MARKER, is_present


class TestPingReadXml:
    """Tests for parsing <ping-results>."""

    def test_reads_fixture(self, ping_xml, expected_ping):
        """Test the full reply parses into the expected record."""
        assert Ping.read_xml(ping_xml) == expected_ping

    def test_embedded_newlines_removed(self, ping_xml):
        """Test newlines inside text nodes do not reach the record."""
        ping = Ping.read_xml(ping_xml)

        assert ping.target_host == "8.8.8.8"
        assert ping.target_ip == "8.8.8.8"
        assert ping.packet_size == 1200

    def test_namespaced_attribute(self, ping_xml):
        """Test junos:date-determined is matched by local name."""
        ping = Ping.read_xml(ping_xml)

        assert [p.date_determined for p in ping.probe_results] == [
            1447350764,
            1447350765,
            1447350766,
            1447350767,
            1447350768,
        ]

    def test_probe_order_preserved(self, ping_xml):
        """Test probes keep device order."""
        ping = Ping.read_xml(ping_xml)

        assert [p.sequence_number for p in ping.probe_results] == [0, 1, 2, 3, 4]

    def test_presence_markers(self, ping_xml):
        """Test <probe-success/> is present and <probe-failure> absent."""
        probe = Ping.read_xml(ping_xml).probe_results[0]

        assert probe.probe_success == MARKER
        assert is_present(probe.probe_success)
        assert probe.probe_failure is None
        assert not is_present(probe.probe_failure)

    def test_accepts_text(self, ping_xml):
        """Test str input parses the same as bytes."""
        assert Ping.read_xml(ping_xml.decode("utf-8")) == Ping.read_xml(ping_xml)

    def test_minimal_reply(self):
        """Test absent optional data stays unset."""
        ping = Ping.read_xml(b"<ping-results><target-host>h</target-host></ping-results>")

        assert ping.target_host == "h"
        assert ping.target_ip is None
        assert ping.probe_results == []
        assert ping.summary is None
        assert ping.xmlns is None

    def test_rpc_error(self):
        """Test an rpc-error reply parses as data."""
        data = b"""<ping-results>
<rpc-error>
<error-severity>error</error-severity>
<error-message>
no response from host
</error-message>
</rpc-error>
</ping-results>"""
        ping = Ping.read_xml(data)

        assert len(ping.errors) == 1
        assert ping.errors[0].error_severity == "error"
        assert ping.errors[0].error_message == "no response from host"

    def test_wrong_root(self, traceroute_xml):
        """Test a reply of another family is rejected."""
        with pytest.raises(XMLParsingError) as exc_info:
            Ping.read_xml(traceroute_xml)

        assert exc_info.value.expected_root == "ping-results"
        assert exc_info.value.found_root == "traceroute-results"

    def test_malformed(self):
        """Test malformed XML raises."""
        with pytest.raises(XMLParsingError):
            Ping.read_xml(b"<ping-results><target-host>")

    def test_invalid_integer(self):
        """Test a non-numeric integer field raises."""
        with pytest.raises(XMLParsingError, match="packet-size"):
            Ping.read_xml(b"<ping-results><packet-size>big</packet-size></ping-results>")


class TestPingReadJson:
    """Tests for parsing the JSON form."""

    def test_reads_fixture(self, ping_json, expected_ping):
        """Test JSON parses into the same data as the XML."""
        ping = Ping.read_json(ping_json)

        assert ping.model_copy(update={"origin_host": None, "origin_ip": None}) == (
            expected_ping.model_copy(update={"xmlns": None})
        )

    def test_origin_fields(self, ping_json):
        """Test originhost and originip are read from JSON."""
        ping = Ping.read_json(ping_json)

        assert ping.origin_host == "mx1.example.net"
        assert ping.origin_ip == "192.0.2.1"

    def test_unknown_keys_ignored(self):
        """Test keys outside the schema are ignored."""
        ping = Ping.read_json(b'{"target-host": "h", "extra": 1}')

        assert ping.target_host == "h"

    def test_invalid_json(self):
        """Test malformed JSON raises."""
        with pytest.raises(JSONParsingError):
            Ping.read_json(b'{"target-host": ')

    def test_wrong_type(self):
        """Test a value of the wrong type raises."""
        with pytest.raises(JSONParsingError):
            Ping.read_json(b'{"packet-size": "big"}')


class TestPingWrite:
    """Tests for XML and JSON output."""

    def test_xml_round_trip(self, ping_xml, expected_ping):
        """Test written XML reads back to an equal record."""
        ping = Ping.read_xml(ping_xml)
        written = ping.write_xml()

        assert Ping.read_xml(written) == expected_ping
        assert Ping.read_xml(written).write_xml() == written

    def test_xml_root_namespace(self, expected_ping):
        """Test the namespace is emitted as the default namespace."""
        written = expected_ping.write_xml()

        assert written.startswith(
            b'<ping-results xmlns="http://xml.juniper.net/junos/12.3R7/junos-probe-tests">'
        )

    def test_xml_presence_marker_empty_element(self):
        """Test presence markers are written as empty elements."""
        ping = Ping(probe_results=[ProbeResult(probe_index=1, probe_success=MARKER)])

        assert ping.write_xml() == (
            b"<ping-results><probe-result><probe-index>1</probe-index>"
            b"<probe-success/></probe-result></ping-results>"
        )

    def test_xml_attribute_written(self):
        """Test date-determined is written as an attribute."""
        ping = Ping(probe_results=[ProbeResult(date_determined=1447350764)])

        assert b'<probe-result date-determined="1447350764"/>' in ping.write_xml()

    def test_xml_omits_origin(self, ping_json):
        """Test JSON-only fields never appear in XML."""
        written = Ping.read_json(ping_json).write_xml()

        assert b"originhost" not in written
        assert b"originip" not in written

    def test_xml_pretty(self, expected_ping):
        """Test pretty output parses back to the same record."""
        written = expected_ping.write_xml(pretty=True)

        assert b"\n  <target-host>" in written
        assert Ping.read_xml(written) == expected_ping

    def test_json_round_trip(self, ping_json):
        """Test written JSON reads back to an equal record."""
        ping = Ping.read_json(ping_json)
        written = ping.write_json()

        assert Ping.read_json(written) == ping
        assert Ping.read_json(written).write_json() == written

    def test_json_wire_names(self, ping_json):
        """Test JSON output uses kebab-case keys and omits absent fields."""
        data = json.loads(Ping.read_json(ping_json).write_json())

        assert data["target-host"] == "8.8.8.8"
        assert data["originhost"] == "mx1.example.net"
        assert data["probe-result"][0]["probe-success"] == ""
        assert "probe-failure" not in data["probe-result"][0]
        assert "rpc-error" not in data

    def test_json_omits_namespace(self, ping_xml):
        """Test the XML namespace never appears in JSON."""
        data = json.loads(Ping.read_xml(ping_xml).write_json())

        assert "xmlns" not in data

    def test_json_compact_by_default(self, expected_ping):
        """Test default JSON output has no whitespace between tokens."""
        written = expected_ping.write_json()

        assert written.startswith(b'{"target-host":"8.8.8.8","target-ip":"8.8.8.8"')

    def test_json_indent(self, expected_ping):
        """Test an indent width produces multi-line output."""
        written = expected_ping.write_json(indent=2)

        assert written.startswith(b'{\n  "target-host": "8.8.8.8"')

    def test_xml_to_json_to_xml(self, ping_xml, expected_ping):
        """Test converting through JSON keeps the data."""
        via_json = Ping.read_json(Ping.read_xml(ping_xml).write_json())

        assert via_json == expected_ping.model_copy(update={"xmlns": None})


class TestPingCliText:
    """Tests for console output."""

    def test_renders_fixture(self, ping_xml, ping_cli):
        """Test the rendered text matches the device output."""
        assert Ping.read_xml(ping_xml).write_cli_text() == ping_cli

    def test_json_and_xml_render_the_same(self, ping_xml, ping_json):
        """Test the same reply renders identically from either format."""
        assert Ping.read_json(ping_json).write_cli_text() == Ping.read_xml(ping_xml).write_cli_text()

    def test_header_only(self):
        """Test a reply without probes renders just the header."""
        ping = Ping(target_host="example.net", target_ip="192.0.2.7", packet_size=56)

        assert ping.write_cli_text() == "PING example.net (192.0.2.7): 56 data bytes\n"

    def test_three_decimals(self):
        """Test RTT is printed in milliseconds with three decimals."""
        ping = Ping(
            target_host="h",
            target_ip="192.0.2.7",
            packet_size=56,
            probe_results=[
                ProbeResult(
                    sequence_number=0,
                    ip_address="192.0.2.7",
                    time_to_live=64,
                    response_size=64,
                    rtt=12850,
                )
            ],
        )

        lines = ping.write_cli_text().splitlines()

        assert lines[1] == "64 bytes from 192.0.2.7: icmp_seq=0 ttl=64 time=12.850 ms"
