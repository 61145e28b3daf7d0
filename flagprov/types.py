"""Core evaluation types shared by every flag provider."""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Generic, Mapping, TypeVar, Union

T = TypeVar("T")

FieldValue = Union[str, bool, int, float, datetime, Mapping[str, Any]]


class EvaluationReason(str, Enum):
    """Why a flag resolved to the value it did."""

    STATIC = "STATIC"
    DEFAULT = "DEFAULT"
    TARGETING_MATCH = "TARGETING_MATCH"
    SPLIT = "SPLIT"
    CACHED = "CACHED"
    DISABLED = "DISABLED"
    UNKNOWN = "UNKNOWN"
    ERROR = "ERROR"

    def __str__(self) -> str:
        return self.value


class ErrorCode(str, Enum):
    """Category of a failed evaluation."""

    PROVIDER_NOT_READY = "PROVIDER_NOT_READY"
    FLAG_NOT_FOUND = "FLAG_NOT_FOUND"
    PARSE_ERROR = "PARSE_ERROR"
    TYPE_MISMATCH = "TYPE_MISMATCH"
    TARGETING_KEY_MISSING = "TARGETING_KEY_MISSING"
    INVALID_CONTEXT = "INVALID_CONTEXT"
    GENERAL = "GENERAL"

    def __str__(self) -> str:
        return self.value


class EvaluationError(Exception):
    """Raised when a flag cannot be evaluated."""

    def __init__(self, code: ErrorCode, message: str | None = None) -> None:
        self.code = code
        self.message = message
        super().__init__(f"{code}: {message}" if message else str(code))


@dataclass(frozen=True)
class EvaluationContext:
    """Targeting key and custom attributes used when evaluating a flag."""

    targeting_key: str | None = None
    custom_fields: dict[str, FieldValue] = field(default_factory=dict)

    def with_targeting_key(self, key: str) -> EvaluationContext:
        """Return a copy of this context with the given targeting key."""
        return dataclasses.replace(self, targeting_key=key)

    def with_custom_field(self, key: str, value: FieldValue) -> EvaluationContext:
        """Return a copy of this context with one more custom field."""
        fields = dict(self.custom_fields)
        fields[key] = value
        return dataclasses.replace(self, custom_fields=fields)


@dataclass
class ResolutionDetails(Generic[T]):
    """The outcome of resolving a single flag."""

    value: T
    variant: str | None = None
    reason: EvaluationReason | None = None
    flag_metadata: dict[str, Any] | None = None


@dataclass(frozen=True)
class ProviderMetadata:
    """Descriptive information about a provider."""

    name: str


class FeatureProvider(ABC):
    """A source of flag values; each resolver raises EvaluationError on failure."""

    @property
    @abstractmethod
    def metadata(self) -> ProviderMetadata:
        """Metadata describing this provider."""

    @abstractmethod
    def resolve_bool_value(
        self, flag_key: str, context: EvaluationContext
    ) -> ResolutionDetails[bool]:
        """Resolve a boolean flag."""

    @abstractmethod
    def resolve_int_value(
        self, flag_key: str, context: EvaluationContext
    ) -> ResolutionDetails[int]:
        """Resolve an integer flag."""

    @abstractmethod
    def resolve_float_value(
        self, flag_key: str, context: EvaluationContext
    ) -> ResolutionDetails[float]:
        """Resolve a floating point flag."""

    @abstractmethod
    def resolve_string_value(
        self, flag_key: str, context: EvaluationContext
    ) -> ResolutionDetails[str]:
        """Resolve a string flag."""

    @abstractmethod
    def resolve_struct_value(
        self, flag_key: str, context: EvaluationContext
    ) -> ResolutionDetails[dict[str, Any]]:
        """Resolve a structured flag."""