"""Flag provider that layers a value cache over an underlying resolver."""

from __future__ import annotations

import copy
import logging
import time
from typing import Any, Callable, Mapping, TypeVar

from flagprov.cache import CacheService, CacheSettings
from flagprov.types import (
    EvaluationContext,
    FeatureProvider,
    ProviderMetadata,
    ResolutionDetails,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def convert_context(context: EvaluationContext) -> dict[str, Any]:
    """Turn an evaluation context into a key-sorted mapping of plain values."""
    fields: dict[str, Any] = {}
    if context.targeting_key is not None:
        fields["targetingKey"] = context.targeting_key
    for key, value in context.custom_fields.items():
        if isinstance(value, (bool, str)):
            fields[key] = value
        elif isinstance(value, (int, float)):
            fields[key] = float(value)
        else:
            fields[key] = str(value) if not isinstance(value, Mapping) else repr(value)
    return dict(sorted(fields.items()))


def convert_struct_value(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Convert a structured response into flat values: nulls become empty strings,
    numbers floats, and nested structures their textual form."""
    result: dict[str, Any] = {}
    for key, value in fields.items():
        if value is None:
            result[key] = ""
        elif isinstance(value, (bool, str)):
            result[key] = value
        elif isinstance(value, (int, float)):
            result[key] = float(value)
        else:
            result[key] = repr(value)
    return result


def _is_bool(value: Any) -> bool:
    return isinstance(value, bool)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_float(value: Any) -> bool:
    return isinstance(value, float)


def _is_str(value: Any) -> bool:
    return isinstance(value, str)


def _is_struct(value: Any) -> bool:
    return isinstance(value, dict)


class FlagdProvider(FeatureProvider):
    """Resolves flags through a resolver, caching resolved values when configured."""

    def __init__(
        self,
        resolver: FeatureProvider,
        cache_settings: CacheSettings | None = None,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._resolver = resolver
        self._cache: CacheService[Any] | None = (
            CacheService(cache_settings, clock=clock)
            if cache_settings is not None
            else None
        )
        logger.debug("FlagdProvider created with cache settings %r", cache_settings)

    def __repr__(self) -> str:
        return f"FlagdProvider(cache={self._cache!r})"

    @property
    def metadata(self) -> ProviderMetadata:
        return self._resolver.metadata

    def _resolve(
        self,
        flag_key: str,
        context: EvaluationContext,
        matches: Callable[[Any], bool],
        resolve: Callable[[str, EvaluationContext], ResolutionDetails[T]],
    ) -> ResolutionDetails[T]:
        if self._cache is not None:
            cached = self._cache.get(flag_key, context)
            if cached is not None and matches(cached):
                return ResolutionDetails(value=cached)
        result = resolve(flag_key, context)
        if self._cache is not None:
            self._cache.add(flag_key, context, copy.deepcopy(result.value))
        return result

    def resolve_bool_value(
        self, flag_key: str, context: EvaluationContext
    ) -> ResolutionDetails[bool]:
        return self._resolve(
            flag_key, context, _is_bool, self._resolver.resolve_bool_value
        )

    def resolve_int_value(
        self, flag_key: str, context: EvaluationContext
    ) -> ResolutionDetails[int]:
        return self._resolve(
            flag_key, context, _is_int, self._resolver.resolve_int_value
        )

    def resolve_float_value(
        self, flag_key: str, context: EvaluationContext
    ) -> ResolutionDetails[float]:
        return self._resolve(
            flag_key, context, _is_float, self._resolver.resolve_float_value
        )

    def resolve_string_value(
        self, flag_key: str, context: EvaluationContext
    ) -> ResolutionDetails[str]:
        return self._resolve(
            flag_key, context, _is_str, self._resolver.resolve_string_value
        )

    def resolve_struct_value(
        self, flag_key: str, context: EvaluationContext
    ) -> ResolutionDetails[dict[str, Any]]:
        return self._resolve(
            flag_key, context, _is_struct, self._resolver.resolve_struct_value
        )