"""Inbound payload variants.

Inbound adapters decide once which variant a body is; the normalizer is the
only place that looks inside it.
"""

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class RawPayload:
    """Body still encoded as JSON text (bytes or str)."""

    body: Union[bytes, str]


@dataclass(frozen=True)
class StructuredPayload:
    """Body already decoded by the hosting platform."""

    data: Any


InboundPayload = Union[RawPayload, StructuredPayload]
