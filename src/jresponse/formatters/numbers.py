"""
Number and marker formatting for CLI text output.

RTT values arrive from the device as integer microseconds. Ping prints
them with exactly three decimals, traceroute with the fewest digits
that represent the value. Decimal arithmetic keeps both exact.
"""

from __future__ import annotations

from decimal import Decimal

from jresponse.constants import CliTemplates


def _to_ms(rtt: int) -> Decimal:
    return Decimal(rtt).scaleb(-3)


def format_ms_fixed(rtt: int | None) -> str:
    """
    Format microseconds as milliseconds with three decimals.

    Args:
        rtt: Round-trip time in microseconds

    Returns:
        Millisecond string, empty if rtt is None

    Example:
        >>> format_ms_fixed(4635)
        '4.635'
        >>> format_ms_fixed(12850)
        '12.850'
    """
    if rtt is None:
        return ""
    return f"{_to_ms(rtt):.3f}"


def format_ms_minimal(rtt: int | None) -> str:
    """
    Format microseconds as milliseconds, dropping trailing zeros.

    Args:
        rtt: Round-trip time in microseconds

    Returns:
        Millisecond string, empty if rtt is None

    Example:
        >>> format_ms_minimal(12850)
        '12.85'
        >>> format_ms_minimal(10000)
        '10'
    """
    if rtt is None:
        return ""
    return format(_to_ms(rtt).normalize(), "f")


def next_hop_indicator(selected: str | None) -> str:
    """Return '>' for the selected next hop, a space otherwise."""
    if selected is None:
        return CliTemplates.OTHER_NEXT_HOP
    return CliTemplates.SELECTED_NEXT_HOP


def text(value: object) -> str:
    """Render an optional scalar, None as empty text."""
    return "" if value is None else str(value)
