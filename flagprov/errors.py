"""Errors raised while setting up or talking to a flag service."""

from __future__ import annotations


class FlagdError(Exception):
    """Base class for provider set-up and connection failures."""

    label = "Provider error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self.label}: {self.message}"

    @classmethod
    def from_exception(cls, error: BaseException) -> ProviderError:
        """Wrap any exception as a ProviderError carrying its text."""
        return ProviderError(str(error))


class ProviderError(FlagdError):
    """A failure inside the provider."""

    label = "Provider error"


class FlagdConnectionError(FlagdError):
    """A failure to reach the flag service."""

    label = "Connection error"


class ConfigError(FlagdError):
    """Invalid provider configuration."""

    label = "Invalid configuration"