"""
jresponse: Junos RPC reply conversion.

Converts Junos operational RPC replies between three representations:
- XML as returned by the device over NETCONF
- JSON for downstream tooling
- CLI text matching the device's own console output

Supported replies: ping, traceroute and `show route protocol bgp`.
"""

from __future__ import annotations

from jresponse.models import BGPRoute, Ping, TraceRoute, read_any_xml
from jresponse.protocols import Consumable, Producible, ResponseReaderWriter

__version__ = "0.1.0"
__all__ = [
    "__version__",
    "Ping",
    "TraceRoute",
    "BGPRoute",
    "read_any_xml",
    "Producible",
    "Consumable",
    "ResponseReaderWriter",
]
