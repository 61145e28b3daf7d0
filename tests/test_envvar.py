import math

import pytest

from flagprov.envvar import EnvVarProvider
from flagprov.types import ErrorCode, EvaluationContext, EvaluationError, EvaluationReason

ENV = {
    "boolean-flag": "true",
    "string-flag": "hi",
    "integer-flag": "10",
    "float-flag": "0.5",
}


@pytest.fixture
def provider():
    return EnvVarProvider(dict(ENV))


@pytest.fixture
def ctx():
    return EvaluationContext()


def test_metadata():
    assert EnvVarProvider().metadata.name == "Environment Variables Provider"


def test_boolean_flag(provider, ctx):
    assert provider.resolve_bool_value("boolean-flag", ctx).value is True


def test_boolean_details(provider, ctx):
    details = provider.resolve_bool_value("boolean-flag", ctx)
    assert details.value is True
    assert details.reason == EvaluationReason.STATIC


def test_string_flag(provider, ctx):
    assert provider.resolve_string_value("string-flag", ctx).value == "hi"


def test_integer_flag(provider, ctx):
    assert provider.resolve_int_value("integer-flag", ctx).value == 10


def test_float_flag(provider, ctx):
    assert provider.resolve_float_value("float-flag", ctx).value == 0.5


def test_missing_flag(provider, ctx):
    with pytest.raises(EvaluationError) as info:
        provider.resolve_string_value("missing-flag", ctx)
    assert str(info.value.code) == "FLAG_NOT_FOUND"
    assert info.value.message == "Error evaluating environment variable"


def test_reads_process_environment(monkeypatch, ctx):
    monkeypatch.setenv("TEST_ENV_VAR", "false")
    assert EnvVarProvider().resolve_string_value("TEST_ENV_VAR", ctx).value == "false"
    assert EnvVarProvider().resolve_bool_value("TEST_ENV_VAR", ctx).value is False


def test_int_max(ctx):
    provider = EnvVarProvider({"TEST_INT_ENV_VAR": str(2**63 - 1)})
    assert provider.resolve_int_value("TEST_INT_ENV_VAR", ctx).value == 2**63 - 1


def test_int_overflow_is_type_mismatch(ctx):
    provider = EnvVarProvider({"X": str(2**63)})
    with pytest.raises(EvaluationError) as info:
        provider.resolve_int_value("X", ctx)
    assert info.value.code == ErrorCode.TYPE_MISMATCH


def test_float_pi(ctx):
    provider = EnvVarProvider({"TEST_FLOAT_ENV_VAR": repr(math.pi)})
    assert provider.resolve_float_value("TEST_FLOAT_ENV_VAR", ctx).value == math.pi


@pytest.mark.parametrize("text", ["True", "1", "yes", ""])
def test_bool_type_mismatch(text, ctx):
    provider = EnvVarProvider({"X": text})
    with pytest.raises(EvaluationError) as info:
        provider.resolve_bool_value("X", ctx)
    assert info.value.code == ErrorCode.TYPE_MISMATCH


@pytest.mark.parametrize("text", ["1.5", "abc", "1_000", " 1"])
def test_int_type_mismatch(text, ctx):
    provider = EnvVarProvider({"X": text})
    with pytest.raises(EvaluationError) as info:
        provider.resolve_int_value("X", ctx)
    assert info.value.code == ErrorCode.TYPE_MISMATCH


@pytest.mark.parametrize("text", ["abc", "1_0", " 1.0", "."])
def test_float_type_mismatch(text, ctx):
    provider = EnvVarProvider({"X": text})
    with pytest.raises(EvaluationError) as info:
        provider.resolve_float_value("X", ctx)
    assert info.value.code == ErrorCode.TYPE_MISMATCH


@pytest.mark.parametrize("text,expected", [("+3", 3.0), ("1e3", 1000.0), ("-.5", -0.5), ("7.", 7.0)])
def test_float_forms(text, expected, ctx):
    provider = EnvVarProvider({"X": text})
    assert provider.resolve_float_value("X", ctx).value == expected


def test_float_infinity(ctx):
    provider = EnvVarProvider({"X": "inf", "Y": "-inf"})
    assert provider.resolve_float_value("X", ctx).value == math.inf
    assert provider.resolve_float_value("Y", ctx).value == -math.inf


@pytest.mark.parametrize(
    "method, code",
    [
        ("resolve_bool_value", ErrorCode.FLAG_NOT_FOUND),
        ("resolve_int_value", ErrorCode.FLAG_NOT_FOUND),
        ("resolve_float_value", ErrorCode.FLAG_NOT_FOUND),
        ("resolve_string_value", ErrorCode.FLAG_NOT_FOUND),
        ("resolve_struct_value", ErrorCode.GENERAL),
    ],
)
def test_empty_key_is_error(provider, ctx, method, code):
    with pytest.raises(EvaluationError) as info:
        getattr(provider, method)("", ctx)
    assert info.value.code == code


def test_struct_not_supported(provider, ctx):
    with pytest.raises(EvaluationError) as info:
        provider.resolve_struct_value("string-flag", ctx)
    assert info.value.code == ErrorCode.GENERAL
    assert info.value.message == "Structs are not supported"