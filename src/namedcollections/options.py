"""
Construction options for named collections.

Provides a frozen Pydantic model that validates and normalizes the optional
arguments shared by :class:`~namedcollections.collections.NamedCollection`,
:func:`~namedcollections.collections.to_named_collection` and
:class:`~namedcollections.models.NamedModelCollection`.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from namedcollections.comparers import ORDINAL_IGNORE_CASE, StringComparer

DEFAULT_NAME = "default"


class CollectionOptions(BaseModel):
    """
    Options controlling how names are matched and duplicates are handled.

    Parameters:
        string_comparer: Equality strategy for names (default: ordinal, ignoring case)
        default_name: Name identifying the default value; ``None`` or ``""`` means ``"default"``
        strict: Whether duplicate names raise instead of last-write-wins
    """

    model_config = ConfigDict(frozen=True)

    string_comparer: StringComparer = Field(
        default=ORDINAL_IGNORE_CASE.name, validate_default=True
    )
    default_name: str = Field(default=DEFAULT_NAME)
    strict: bool = Field(default=True)

    @field_validator("default_name", mode="before")
    @classmethod
    def normalize_default_name(cls, value: Any) -> Any:
        """Replace a missing or empty default name with ``"default"``."""
        if value is None or value == "":
            return DEFAULT_NAME
        return value
