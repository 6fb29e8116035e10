"""
Exception hierarchy for jresponse.

All exceptions inherit from JResponseError for unified error handling.
Specific exceptions provide detailed context for debugging.

RPC errors reported by the device are not exceptions; they are parsed
into RPCError records like any other field.
"""

from __future__ import annotations

from typing import Any


class JResponseError(Exception):
    """
    Base exception for all jresponse errors.

    All custom exceptions inherit from this class, allowing callers
    to catch all jresponse errors with a single except clause.

    Attributes:
        message: Human-readable error description
        context: Optional dictionary with additional error context
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(JResponseError):
    """
    Error in configuration parsing or validation.

    Raised when:
    - An environment variable holds an invalid value
    - An unknown output format is requested
    """

    pass


# =============================================================================
# Input Errors
# =============================================================================


class MalformedInputError(JResponseError):
    """
    Input does not parse or does not match the expected record structure.

    Also raised when a record cannot be serialized, since the produced
    bytes would not be a valid document for the record's schema.

    Attributes:
        record_type: Name of the record family being read or written
    """

    def __init__(
        self,
        message: str,
        record_type: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        ctx = {"record_type": record_type} if record_type else {}
        ctx.update(context or {})
        super().__init__(message, context=ctx)
        self.record_type = record_type


class XMLParsingError(MalformedInputError):
    """
    Failed to parse XML data.

    Attributes:
        expected_root: Root element the record family expects
        found_root: Root element actually found (if the document parsed)
    """

    def __init__(
        self,
        message: str,
        record_type: str | None = None,
        expected_root: str | None = None,
        found_root: str | None = None,
    ):
        context: dict[str, Any] = {}
        if expected_root:
            context["expected_root"] = expected_root
        if found_root:
            context["found_root"] = found_root
        super().__init__(message, record_type=record_type, context=context)
        self.expected_root = expected_root
        self.found_root = found_root


class JSONParsingError(MalformedInputError):
    """Failed to parse JSON data or validate it against the record schema."""

    pass


class UnknownRecordError(MalformedInputError):
    """XML root element does not belong to any known record family."""

    def __init__(self, root_tag: str):
        super().__init__(f"No record type for root element: {root_tag}", context={"root": root_tag})
        self.root_tag = root_tag


# =============================================================================
# Rendering Errors
# =============================================================================


class RenderingError(JResponseError):
    """
    CLI text rendering could not complete.

    Renderers tolerate missing optional data, so this signals a
    programming defect such as a record of the wrong family.

    Attributes:
        renderer: Name of the renderer that failed
    """

    def __init__(self, renderer: str, reason: str):
        super().__init__(
            f"Failed to render {renderer} output: {reason}",
            context={"renderer": renderer, "reason": reason},
        )
        self.renderer = renderer
        self.reason = reason


# Names used by callers that think in terms of failure kinds
MalformedInput = MalformedInputError
RenderingFailure = RenderingError
