import pytest

from flagprov.errors import (
    ConfigError,
    FlagdConnectionError,
    FlagdError,
    ProviderError,
)


@pytest.mark.parametrize(
    "cls, prefix",
    [
        (ProviderError, "Provider error"),
        (FlagdConnectionError, "Connection error"),
        (ConfigError, "Invalid configuration"),
    ],
)
def test_messages_carry_prefix(cls, prefix):
    err = cls("boom")
    assert str(err) == f"{prefix}: boom"
    assert err.message == "boom"
    assert isinstance(err, FlagdError)


def test_from_exception_wraps_as_provider_error():
    wrapped = FlagdError.from_exception(ValueError("bad value"))
    assert type(wrapped) is ProviderError
    assert wrapped.message == "bad value"
    assert str(wrapped) == "Provider error: bad value"


def test_from_exception_on_subclass_still_provider_error():
    wrapped = ConfigError.from_exception(OSError("disk"))
    assert type(wrapped) is ProviderError
    assert wrapped.message == "disk"
    assert str(wrapped) == "Provider error: disk"


def _raise(err):
    raise err


@pytest.mark.parametrize(
    "make, message, text",
    [
        (lambda: ProviderError("a"), "a", "Provider error: a"),
        (lambda: FlagdConnectionError("refused"), "refused", "Connection error: refused"),
        (lambda: ConfigError("c"), "c", "Invalid configuration: c"),
        (
            lambda: FlagdError.from_exception(RuntimeError("wrapped")),
            "wrapped",
            "Provider error: wrapped",
        ),
    ],
)
def test_errors_can_be_caught_as_base(make, message, text):
    with pytest.raises(FlagdError) as exc_info:
        _raise(make())
    assert exc_info.value.message == message
    assert str(exc_info.value) == text