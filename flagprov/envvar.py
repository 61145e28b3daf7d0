"""Flag provider that reads flag values from environment variables."""

from __future__ import annotations

import os
import re
from typing import Any, Callable, Mapping, TypeVar

from flagprov.types import (
    ErrorCode,
    EvaluationContext,
    EvaluationError,
    EvaluationReason,
    FeatureProvider,
    ProviderMetadata,
    ResolutionDetails,
)

T = TypeVar("T")

METADATA_NAME = "Environment Variables Provider"
ERROR_MESSAGE = "Error evaluating environment variable"

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)",
    re.IGNORECASE,
)


def _parse_bool(text: str) -> bool:
    if text == "true":
        return True
    if text == "false":
        return False
    raise ValueError(f"not a boolean: {text!r}")


def _parse_int(text: str) -> int:
    if not _INT_PATTERN.fullmatch(text):
        raise ValueError(f"not an integer: {text!r}")
    number = int(text)
    if not _INT64_MIN <= number <= _INT64_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return number


def _parse_float(text: str) -> float:
    if not _FLOAT_PATTERN.fullmatch(text):
        raise ValueError(f"not a float: {text!r}")
    return float(text)


class EnvVarProvider(FeatureProvider):
    """Resolves flags from environment variables; structured flags are unsupported."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ
        self._metadata = ProviderMetadata(METADATA_NAME)

    @property
    def metadata(self) -> ProviderMetadata:
        return self._metadata

    @property
    def _env(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    def _evaluate(
        self, flag_key: str, parse: Callable[[str], T]
    ) -> ResolutionDetails[T]:
        raw = self._env.get(flag_key) if flag_key else None
        if raw is None:
            raise EvaluationError(ErrorCode.FLAG_NOT_FOUND, ERROR_MESSAGE)
        try:
            value = parse(raw)
        except ValueError:
            raise EvaluationError(ErrorCode.TYPE_MISMATCH, ERROR_MESSAGE) from None
        return ResolutionDetails(value=value, reason=EvaluationReason.STATIC)

    def resolve_bool_value(
        self, flag_key: str, context: EvaluationContext
    ) -> ResolutionDetails[bool]:
        """Resolve a flag whose variable holds exactly "true" or "false"."""
        return self._evaluate(flag_key, _parse_bool)

    def resolve_int_value(
        self, flag_key: str, context: EvaluationContext
    ) -> ResolutionDetails[int]:
        """Resolve a flag whose variable holds a 64-bit signed integer."""
        return self._evaluate(flag_key, _parse_int)

    def resolve_float_value(
        self, flag_key: str, context: EvaluationContext
    ) -> ResolutionDetails[float]:
        """Resolve a flag whose variable holds a floating point number."""
        return self._evaluate(flag_key, _parse_float)

    def resolve_string_value(
        self, flag_key: str, context: EvaluationContext
    ) -> ResolutionDetails[str]:
        """Resolve a flag whose variable holds any string."""
        return self._evaluate(flag_key, str)

    def resolve_struct_value(
        self, flag_key: str, context: EvaluationContext
    ) -> ResolutionDetails[dict[str, Any]]:
        """Always fails: structured flags cannot come from environment variables."""
        raise EvaluationError(ErrorCode.GENERAL, "Structs are not supported")