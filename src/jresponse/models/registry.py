"""
Record family lookup by XML root element.

Lets callers that receive an arbitrary RPC reply pick the matching
record class without knowing which RPC produced it.
"""

from __future__ import annotations

import logging
from typing import Final

from jresponse.codec.xml import decode_element, local_name, parse_xml
from jresponse.constants import XmlRoots
from jresponse.core.exceptions import UnknownRecordError
from jresponse.models.bgp import BGPRoute
from jresponse.models.ping import Ping
from jresponse.models.traceroute import TraceRoute

logger = logging.getLogger(__name__)

RECORD_TYPES: Final[dict[str, type[Ping] | type[TraceRoute] | type[BGPRoute]]] = {
    XmlRoots.PING: Ping,
    XmlRoots.TRACEROUTE: TraceRoute,
    XmlRoots.ROUTE_INFORMATION: BGPRoute,
}


def record_type_for_root(root_tag: str) -> type[Ping] | type[TraceRoute] | type[BGPRoute]:
    """
    Return the record class for an XML root element.

    Args:
        root_tag: Root element local name or Clark-notation tag

    Raises:
        UnknownRecordError: If no record family uses this root
    """
    name = local_name(root_tag)
    try:
        return RECORD_TYPES[name]
    except KeyError:
        raise UnknownRecordError(name) from None


def read_any_xml(data: bytes | str) -> Ping | TraceRoute | BGPRoute:
    """
    Parse an RPC reply of any supported family.

    Args:
        data: Raw XML reply

    Returns:
        Populated record of the family matching the root element

    Raises:
        XMLParsingError: If the XML is malformed or does not fit the schema
        UnknownRecordError: If the root element is not recognized
    """
    root = parse_xml(data)
    model_cls = record_type_for_root(root.tag)
    logger.debug(f"Detected {model_cls.__name__} reply")
    record: Ping | TraceRoute | BGPRoute = decode_element(model_cls, root)
    return record
