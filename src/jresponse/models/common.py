"""
Shared pieces of the record schemas.

WireModel fixes the pydantic configuration every record class uses;
RPCError is the error element every Junos RPC reply may carry.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from jresponse.models.fields import XmlInnerMarkup


class WireModel(BaseModel):
    """
    Pydantic configuration shared by all record classes.

    - Fields are populated by alias (wire name) or by attribute name
    - Unknown keys in JSON input are ignored
    - Whitespace is preserved; trimming happens only when rendering
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        str_strip_whitespace=False,
    )


class RPCError(WireModel):
    """
    Structured error returned by the device's management protocol.

    These are ordinary data: a reply carrying rpc-error elements parses
    and renders like any other reply.

    Attributes:
        error_type: Layer the error occurred in (protocol, application, ...)
        error_tag: Error identifier
        error_severity: error or warning
        error_path: Path to the offending element
        error_message: Human-readable message
        error_info: Raw inner markup of <error-info>, kept verbatim as text
    """

    error_type: str | None = Field(default=None, alias="error-type")
    error_tag: str | None = Field(default=None, alias="error-tag")
    error_severity: str | None = Field(default=None, alias="error-severity")
    error_path: str | None = Field(default=None, alias="error-path")
    error_message: str | None = Field(default=None, alias="error-message")
    error_info: Annotated[str | None, XmlInnerMarkup()] = Field(default=None, alias="error-info")
