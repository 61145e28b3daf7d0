"""Configuration of the flagd provider, read from arguments or environment."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping

from flagprov.cache import CacheSettings

_UINT_PATTERN = re.compile(r"\+?[0-9]+")

_U16_MAX = 2**16 - 1
_U32_MAX = 2**32 - 1

_DEFAULT_PORT = 8013
_IN_PROCESS_PORT = 8015


def _parse_uint(text: str | None, maximum: int) -> int | None:
    """Parse an unsigned integer no larger than maximum, or return None."""
    if text is None or not _UINT_PATTERN.fullmatch(text):
        return None
    number = int(text)
    return number if number <= maximum else None


class ResolverType(str, Enum):
    """How flags are evaluated."""

    RPC = "rpc"
    REST = "rest"
    IN_PROCESS = "in-process"
    FILE = "file"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str) -> ResolverType:
        """Parse a resolver name case-insensitively; unknown names mean RPC."""
        name = value.upper()
        if name == "REST":
            return cls.REST
        if name in ("IN-PROCESS", "INPROCESS"):
            return cls.IN_PROCESS
        if name in ("FILE", "OFFLINE"):
            return cls.FILE
        return cls.RPC


@dataclass
class FlagdOptions:
    """Settings for connecting to and evaluating against a flag service."""

    host: str = "localhost"
    port: int = _DEFAULT_PORT
    target_uri: str | None = None
    resolver_type: ResolverType = ResolverType.RPC
    tls: bool = False
    cert_path: str | None = None
    deadline_ms: int = 500
    cache_settings: CacheSettings | None = field(default_factory=CacheSettings)
    retry_backoff_ms: int = 1000
    retry_backoff_max_ms: int = 120000
    retry_grace_period: int = 5
    selector: str | None = None
    socket_path: str | None = None
    source_configuration: str | None = None
    stream_deadline_ms: int = 600000
    offline_poll_interval_ms: int | None = 5000

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> FlagdOptions:
        """Build options from FLAGD_* environment variables, with defaults."""
        env = os.environ if environ is None else environ

        raw_resolver = env.get("FLAGD_RESOLVER")
        resolver_type = (
            ResolverType.parse(raw_resolver)
            if raw_resolver is not None
            else ResolverType.RPC
        )
        default_port = (
            _IN_PROCESS_PORT
            if resolver_type is ResolverType.IN_PROCESS
            else _DEFAULT_PORT
        )

        def number(name: str, default: int, maximum: int = _U32_MAX) -> int:
            parsed = _parse_uint(env.get(name), maximum)
            return default if parsed is None else parsed

        tls_raw = env.get("FLAGD_TLS")
        options = cls(
            host=env.get("FLAGD_HOST", "localhost"),
            port=number("FLAGD_PORT", default_port, _U16_MAX),
            target_uri=env.get("FLAGD_TARGET_URI"),
            resolver_type=resolver_type,
            tls=tls_raw is not None and tls_raw.lower() == "true",
            cert_path=env.get("FLAGD_SERVER_CERT_PATH"),
            deadline_ms=number("FLAGD_DEADLINE_MS", 500),
            cache_settings=CacheSettings.from_env(env),
            retry_backoff_ms=number("FLAGD_RETRY_BACKOFF_MS", 1000),
            retry_backoff_max_ms=number("FLAGD_RETRY_BACKOFF_MAX_MS", 120000),
            retry_grace_period=number("FLAGD_RETRY_GRACE_PERIOD", 5),
            selector=env.get("FLAGD_SOURCE_SELECTOR"),
            socket_path=env.get("FLAGD_SOCKET_PATH"),
            source_configuration=env.get("FLAGD_OFFLINE_FLAG_SOURCE_PATH"),
            stream_deadline_ms=number("FLAGD_STREAM_DEADLINE_MS", 600000),
            offline_poll_interval_ms=number("FLAGD_OFFLINE_POLL_MS", 5000),
        )

        if (
            options.source_configuration is not None
            and options.resolver_type is not ResolverType.RPC
        ):
            options.resolver_type = ResolverType.FILE

        return options