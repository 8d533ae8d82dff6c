"""Shared field types for frozen models."""

from __future__ import annotations

from types import MappingProxyType
from typing import Annotated

from pydantic import AfterValidator, PlainSerializer

# Read-only category -> percentage mapping; dumps back to a plain dict
ReadOnlyPercentages = Annotated[
    dict[str, int],
    AfterValidator(lambda v: MappingProxyType(dict(v))),
    PlainSerializer(lambda v: dict(v), return_type=dict[str, int]),
]

