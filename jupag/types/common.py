#!/usr/bin/env python3
"""
JUPAG - Shared record plumbing

Base model for every Jupiter record plus the query-string encoder.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class JupiterModel(BaseModel):
    """
    camelCase on the wire, snake_case in Python.
    Unknown response fields are ignored.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_payload(self) -> dict[str, Any]:
        """JSON body for POST endpoints."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class PassthroughModel(JupiterModel):
    """Record that is echoed back to the API, so unknown fields are kept."""

    model_config = ConfigDict(extra="allow")


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (list, tuple)):
        return ",".join(_query_value(v) for v in value)
    return str(value)


def to_query_params(model: JupiterModel) -> dict[str, str]:
    """
    Flatten a request record into query parameters.
    None is dropped, lists become comma-joined, booleans lowercase.
    """
    dumped = model.model_dump(mode="json", by_alias=True, exclude_none=True)
    return {key: _query_value(value) for key, value in dumped.items()}


def comma_params(name: str, values: list[str]) -> dict[str, str]:
    return {name: ",".join(values)}
