# flagprov

Feature flag providers and the pieces around them. The package has no
runtime dependencies.

- `flagprov.types` holds the shared vocabulary: `EvaluationContext`,
  `ResolutionDetails`, `EvaluationReason`, `ErrorCode`, `EvaluationError`,
  `ProviderMetadata` and the abstract `FeatureProvider`, whose
  `resolve_bool_value`, `resolve_int_value`, `resolve_float_value`,
  `resolve_string_value` and `resolve_struct_value` methods either return a
  `ResolutionDetails` or raise `EvaluationError`.
- `flagprov.envvar.EnvVarProvider` resolves flags from environment variables.
- `flagprov.cache.CacheService` caches resolved values by flag key and
  evaluation context, backed by `flagprov.lru.LruCache` or
  `flagprov.inmemory.InMemoryCache`.
- `flagprov.provider.FlagdProvider` puts that cache in front of any other
  `FeatureProvider`.
- `flagprov.options.FlagdOptions` holds the settings of a flagd connection and
  can read them from `FLAGD_*` environment variables.
- `flagprov.errors` defines `FlagdError` and its subclasses `ProviderError`,
  `FlagdConnectionError` and `ConfigError`.

## Installation

```bash
pip install flagprov
```

## Environment-variable flags

```python
import os

from flagprov.envvar import EnvVarProvider
from flagprov.types import EvaluationContext, EvaluationError

os.environ["string-flag"] = "hi"
os.environ["integer-flag"] = "10"

provider = EnvVarProvider()          # or EnvVarProvider({"string-flag": "hi"})
context = EvaluationContext()

print(provider.resolve_string_value("string-flag", context).value)  # hi
print(provider.resolve_int_value("integer-flag", context).value)    # 10

try:
    provider.resolve_string_value("missing-flag", context)
except EvaluationError as error:
    print(error.code)  # FLAG_NOT_FOUND
```

Successful results carry the reason `STATIC`. Booleans must be exactly
`true` or `false`; integers must fit in a signed 64-bit range. A missing
variable (or an empty flag key) raises `EvaluationError` with
`FLAG_NOT_FOUND`, a value that does not parse raises `TYPE_MISMATCH`, and
`resolve_struct_value` always raises with `GENERAL`, since structured flags
are not supported. The provider's `metadata.name` is
`"Environment Variables Provider"`.

## Caching evaluations

```python
from flagprov.cache import CacheService, CacheSettings, CacheType
from flagprov.types import EvaluationContext

cache = CacheService(CacheSettings(cache_type=CacheType.LRU, max_size=100, ttl=60.0))

context = (
    EvaluationContext()
    .with_targeting_key("user1")
    .with_custom_field("email", "test1@example.com")
)

cache.add("feature-flag", context, "variant1")
print(cache.get("feature-flag", context))  # variant1
```

Entries are keyed by the flag key together with the targeting key and custom
fields of the context, so the same flag evaluated for two users is cached
separately. `ttl` is in seconds; once it has passed, `get` drops the entry and
returns `None`. A `ttl` of `None` means entries never expire. With
`CacheType.DISABLED`, or after `disable()`, `add` does nothing and `get`
always returns `None`. `CacheType.parse` accepts `lru`, `mem` and `disabled`
in any case and falls back to `lru`.

`CacheSettings.from_env()` reads `FLAGD_CACHE`, `FLAGD_MAX_CACHE_SIZE` and
`FLAGD_CACHE_TTL`, defaulting to an LRU cache of 1000 entries with a 60 second
time-to-live.

## Caching in front of a provider

```python
from flagprov.cache import CacheSettings
from flagprov.envvar import EnvVarProvider
from flagprov.provider import FlagdProvider
from flagprov.types import EvaluationContext

provider = FlagdProvider(EnvVarProvider({"boolean-flag": "true"}), CacheSettings())
print(provider.resolve_bool_value("boolean-flag", EvaluationContext()).value)  # True
```

The first evaluation goes to the wrapped provider and its value is cached;
later evaluations of the same flag and context, of the same type, are answered
from the cache with a `ResolutionDetails` that carries only the value.
Errors from the wrapped provider are not cached. Passing no cache settings
turns caching off.

`convert_context` turns an `EvaluationContext` into a key-sorted dictionary
(with the targeting key under `targetingKey` and numbers as floats), and
`convert_struct_value` flattens a structured response: `None` becomes an
empty string, numbers become floats, nested values their textual form.

## Configuration

`FlagdOptions()` gives the defaults below; `FlagdOptions.from_env()` reads
each from its environment variable instead, keeping the default where a
variable is unset or does not parse.

| Variable                          | Field                      | Default      |
|-----------------------------------|----------------------------|--------------|
| `FLAGD_RESOLVER`                  | `resolver_type`            | `rpc`        |
| `FLAGD_HOST`                      | `host`                     | `localhost`  |
| `FLAGD_PORT`                      | `port`                     | 8013 (8015 for in-process) |
| `FLAGD_TARGET_URI`                | `target_uri`               | none         |
| `FLAGD_TLS`                       | `tls`                      | `false`      |
| `FLAGD_SERVER_CERT_PATH`          | `cert_path`                | none         |
| `FLAGD_DEADLINE_MS`               | `deadline_ms`              | 500          |
| `FLAGD_RETRY_BACKOFF_MS`          | `retry_backoff_ms`         | 1000         |
| `FLAGD_RETRY_BACKOFF_MAX_MS`      | `retry_backoff_max_ms`     | 120000       |
| `FLAGD_RETRY_GRACE_PERIOD`        | `retry_grace_period`       | 5            |
| `FLAGD_STREAM_DEADLINE_MS`        | `stream_deadline_ms`       | 600000       |
| `FLAGD_SOCKET_PATH`               | `socket_path`              | none         |
| `FLAGD_SOURCE_SELECTOR`           | `selector`                 | none         |
| `FLAGD_OFFLINE_FLAG_SOURCE_PATH`  | `source_configuration`     | none         |
| `FLAGD_OFFLINE_POLL_MS`           | `offline_poll_interval_ms` | 5000         |
| `FLAGD_CACHE`, `FLAGD_MAX_CACHE_SIZE`, `FLAGD_CACHE_TTL` | `cache_settings` | see above |

`ResolverType.parse` accepts `rpc`, `rest`, `in-process`/`inprocess` and
`file`/`offline` in any case, falling back to `rpc`. When an offline flag
source path is set and the resolver is not `rpc`, `from_env` switches the
resolver to `file`.

## What the package does not do

`FlagdOptions` only describes a connection. The package does not talk to a
flagd service over gRPC or HTTP, does not evaluate flag definition files or
targeting rules itself, and does not watch files for changes; `FlagdProvider`
needs another `FeatureProvider` to do the resolving.

## Running the tests

```bash
pip install -e ".[test]"
pytest
```