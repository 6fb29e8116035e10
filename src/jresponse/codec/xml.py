"""
XML codec for record classes.

Maps pydantic record classes to and from lxml element trees. The
mapping is read from each class's field aliases and the markers in
jresponse.models.fields, and is built once per class.

Device replies embed literal newlines inside text nodes (AS paths, age
strings, host names), so every newline is stripped from the raw bytes
before parsing. No field's content depends on an embedded newline.
"""

from __future__ import annotations

import logging
import types
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Any, Union, get_args, get_origin
from xml.sax.saxutils import escape, quoteattr

from lxml import etree
from pydantic import BaseModel, ValidationError

from jresponse.constants import Patterns
from jresponse.core.exceptions import MalformedInputError, XMLParsingError
from jresponse.models.fields import (
    JsonOnly,
    Presence,
    XmlAttr,
    XmlInnerMarkup,
    XmlNamespace,
    XmlText,
)

logger = logging.getLogger(__name__)

# Entities are never expanded and nothing is fetched over the network
_PARSER = etree.XMLParser(
    resolve_entities=False,
    no_network=True,
    remove_comments=True,
    remove_pis=True,
)


class FieldKind(Enum):
    """Where a record field lives in the XML tree."""

    ELEMENT = "element"
    ATTRIBUTE = "attribute"
    TEXT = "text"
    INNER_MARKUP = "inner-markup"
    NAMESPACE = "namespace"
    JSON_ONLY = "json-only"


@dataclass(frozen=True)
class FieldMapping:
    """
    XML mapping of a single record field.

    Attributes:
        name: Python attribute name
        tag: Element or attribute local name
        kind: Where the value lives in the tree
        value_type: int, str, or a nested record class
        repeated: True for list fields (one element per item)
        presence: True for presence-only markers
    """

    name: str
    tag: str
    kind: FieldKind
    value_type: Any
    repeated: bool = False
    presence: bool = False

    @property
    def nested(self) -> bool:
        """Return True if the value is a nested record."""
        return isinstance(self.value_type, type) and issubclass(self.value_type, BaseModel)


def _unwrap(annotation: Any) -> tuple[Any, bool]:
    """Strip Optional and list wrappers, returning (inner type, repeated)."""
    if get_origin(annotation) in (Union, types.UnionType):
        args = [a for a in get_args(annotation) if a is not type(None)]
        annotation = args[0]
    if get_origin(annotation) is list:
        return get_args(annotation)[0], True
    return annotation, False


@lru_cache(maxsize=None)
def field_mappings(model_cls: type[BaseModel]) -> tuple[FieldMapping, ...]:
    """
    Build the XML mapping for a record class, in schema declaration order.

    Args:
        model_cls: Record class

    Returns:
        One FieldMapping per model field
    """
    mappings = []
    for name, info in model_cls.model_fields.items():
        value_type, repeated = _unwrap(info.annotation)
        tag = info.alias or name
        kind = FieldKind.ELEMENT
        presence = False
        for meta in info.metadata:
            if isinstance(meta, XmlAttr):
                kind, tag = FieldKind.ATTRIBUTE, meta.name
            elif isinstance(meta, XmlText):
                kind = FieldKind.TEXT
            elif isinstance(meta, XmlInnerMarkup):
                kind = FieldKind.INNER_MARKUP
            elif isinstance(meta, XmlNamespace):
                kind = FieldKind.NAMESPACE
            elif isinstance(meta, JsonOnly):
                kind = FieldKind.JSON_ONLY
            elif isinstance(meta, Presence):
                presence = True
        mappings.append(
            FieldMapping(
                name=name,
                tag=tag,
                kind=kind,
                value_type=value_type,
                repeated=repeated,
                presence=presence,
            )
        )
    return tuple(mappings)


def normalize_newlines(data: bytes | str) -> bytes:
    """
    Remove every newline character from raw XML.

    Args:
        data: Raw XML as bytes or text

    Returns:
        UTF-8 bytes without CR or LF characters
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    return Patterns.NEWLINES.sub(b"", data)


def local_name(node_name: str) -> str:
    """Return the local part of a Clark-notation or prefixed name."""
    return etree.QName(node_name).localname


def parse_xml(data: bytes | str, record_type: str | None = None) -> etree._Element:
    """
    Normalize and parse raw XML.

    Args:
        data: Raw XML
        record_type: Record family name for error context

    Returns:
        Root element

    Raises:
        XMLParsingError: If the document is not well-formed
    """
    normalized = normalize_newlines(data)
    try:
        return etree.fromstring(normalized, _PARSER)
    except etree.XMLSyntaxError as e:
        raise XMLParsingError(f"Malformed XML: {e}", record_type=record_type) from e


# =============================================================================
# Decoding
# =============================================================================


def _get_attribute(element: etree._Element, name: str) -> str | None:
    for key, value in element.attrib.items():
        if local_name(key) == name:
            return str(value)
    return None


def _inner_markup(element: etree._Element) -> str:
    parts = [escape(element.text or "")]
    parts.extend(etree.tostring(child, encoding="unicode", with_tail=True) for child in element)
    return "".join(parts)


def _leaf_value(mapping: FieldMapping, text: str | None, record_type: str) -> Any:
    if mapping.presence or mapping.value_type is not int:
        return text or ""

    stripped = (text or "").strip()
    if not stripped:
        return None
    try:
        return int(stripped)
    except ValueError as e:
        raise XMLParsingError(
            f"Invalid integer for '{mapping.tag}': {stripped!r}",
            record_type=record_type,
        ) from e


def _decode_element(
    mapping: FieldMapping,
    element: etree._Element,
    record_type: str,
) -> Any:
    if mapping.nested:
        return decode_element(mapping.value_type, element)
    return _leaf_value(mapping, element.text, record_type)


def decode_element(model_cls: type[BaseModel], element: etree._Element) -> BaseModel:
    """
    Decode an element into a fresh record.

    Children and attributes are matched by local name; unknown
    children are ignored. When a non-repeated field matches several
    children, the first one wins.

    Args:
        model_cls: Record class to populate
        element: Element holding the record

    Returns:
        Populated record

    Raises:
        XMLParsingError: If a value does not fit the record schema
    """
    record_type = model_cls.__name__
    children: dict[str, list[etree._Element]] = {}
    for child in element:
        if isinstance(child.tag, str):
            children.setdefault(local_name(child.tag), []).append(child)

    values: dict[str, Any] = {}
    for mapping in field_mappings(model_cls):
        if mapping.kind is FieldKind.JSON_ONLY:
            continue

        if mapping.kind is FieldKind.NAMESPACE:
            values[mapping.name] = etree.QName(element).namespace
        elif mapping.kind is FieldKind.ATTRIBUTE:
            raw = _get_attribute(element, mapping.tag)
            if raw is not None:
                values[mapping.name] = _leaf_value(mapping, raw, record_type)
        elif mapping.kind is FieldKind.TEXT:
            values[mapping.name] = element.text or None
        elif mapping.kind is FieldKind.INNER_MARKUP:
            matches = children.get(mapping.tag)
            if matches:
                values[mapping.name] = _inner_markup(matches[0])
        else:
            matches = children.get(mapping.tag, [])
            if mapping.repeated:
                values[mapping.name] = [
                    _decode_element(mapping, match, record_type) for match in matches
                ]
            elif matches:
                values[mapping.name] = _decode_element(mapping, matches[0], record_type)

    try:
        return model_cls.model_validate(values)
    except ValidationError as e:
        raise XMLParsingError(
            f"XML does not match {record_type} schema: {e}",
            record_type=record_type,
        ) from e


def read_xml(model_cls: type[BaseModel], data: bytes | str, root_tag: str) -> Any:
    """
    Parse raw XML into a fresh record.

    Args:
        model_cls: Record class to populate
        data: Raw XML reply
        root_tag: Expected root element local name

    Returns:
        Populated record of type model_cls

    Raises:
        XMLParsingError: If the XML is malformed, has the wrong root,
            or does not fit the schema
    """
    record_type = model_cls.__name__
    root = parse_xml(data, record_type=record_type)

    found = local_name(root.tag)
    if found != root_tag:
        raise XMLParsingError(
            f"Unexpected root element '{found}'",
            record_type=record_type,
            expected_root=root_tag,
            found_root=found,
        )

    record = decode_element(model_cls, root)
    logger.debug(f"Parsed {record_type} from {len(data)} bytes of XML")
    return record


# =============================================================================
# Encoding
# =============================================================================


def _qualify(namespace: str | None, tag: str) -> str:
    return f"{{{namespace}}}{tag}" if namespace else tag


def _leaf_text(value: Any) -> str:
    return str(value)


def _append_inner_markup(
    parent: etree._Element,
    tag: str,
    markup: str,
    namespace: str | None,
) -> None:
    element = etree.SubElement(parent, _qualify(namespace, tag))
    wrapper = f"<{tag} xmlns={quoteattr(namespace)}>" if namespace else f"<{tag}>"
    try:
        fragment = etree.fromstring(f"{wrapper}{markup}</{tag}>", _PARSER)
    except etree.XMLSyntaxError:
        # Not well-formed markup; keep it as plain text
        element.text = markup
        return

    element.text = fragment.text
    for child in list(fragment):
        element.append(child)


def encode_element(
    record: BaseModel,
    element: etree._Element,
    namespace: str | None = None,
) -> etree._Element:
    """
    Fill an element from a record, in schema declaration order.

    None fields and empty lists are omitted; presence markers are
    written as empty elements.

    Args:
        record: Record to encode
        element: Element to fill
        namespace: Namespace for child elements

    Returns:
        The filled element
    """
    for mapping in field_mappings(type(record)):
        if mapping.kind in (FieldKind.JSON_ONLY, FieldKind.NAMESPACE):
            continue

        value = getattr(record, mapping.name)
        if value is None:
            continue

        if mapping.kind is FieldKind.ATTRIBUTE:
            element.set(mapping.tag, _leaf_text(value))
        elif mapping.kind is FieldKind.TEXT:
            element.text = _leaf_text(value)
        elif mapping.kind is FieldKind.INNER_MARKUP:
            _append_inner_markup(element, mapping.tag, value, namespace)
        else:
            items = value if mapping.repeated else [value]
            for item in items:
                child = etree.SubElement(element, _qualify(namespace, mapping.tag))
                if mapping.nested:
                    encode_element(item, child, namespace)
                elif item != "":
                    child.text = _leaf_text(item)

    return element


def _record_namespace(record: BaseModel) -> str | None:
    for mapping in field_mappings(type(record)):
        if mapping.kind is FieldKind.NAMESPACE:
            namespace: str | None = getattr(record, mapping.name)
            return namespace
    return None


def write_xml(record: BaseModel, root_tag: str, pretty: bool = False) -> bytes:
    """
    Serialize a record to XML bytes.

    The root element carries the record's namespace as the default
    namespace; every child element is in that namespace.

    Args:
        record: Record to serialize
        root_tag: Root element local name
        pretty: Indent the output

    Returns:
        UTF-8 encoded XML without declaration

    Raises:
        MalformedInputError: If a value cannot be represented in XML
    """
    record_type = type(record).__name__
    namespace = _record_namespace(record)
    nsmap = {None: namespace} if namespace else None

    try:
        root = etree.Element(_qualify(namespace, root_tag), nsmap=nsmap)
        encode_element(record, root, namespace)
        output: bytes = etree.tostring(
            root,
            encoding="utf-8",
            xml_declaration=False,
            pretty_print=pretty,
        )
    except (ValueError, TypeError) as e:
        raise MalformedInputError(
            f"Cannot serialize {record_type} to XML: {e}",
            record_type=record_type,
        ) from e

    logger.debug(f"Serialized {record_type} to {len(output)} bytes of XML")
    return output
