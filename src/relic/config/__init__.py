"""
Configuration model for the relic signing service.

The configuration is a single YAML document describing tokens, keys,
authorized clients, and the server, remote, timestamp and AMQP settings.
It is loaded with :func:`read_file`, which runs three steps:

1. **Parse**: YAML is validated into a tree of pydantic models. Unknown
   keys are ignored and absent sections stay ``None``.
2. **Normalize**: client fingerprints are lower-cased and checked, PINs
   from the optional ``pinfile`` are merged into the tokens, and every
   token and key learns its own name. Keys also get a link back to the
   configuration, through which they look up their token by name.
3. **Query**: callers use the accessors on :class:`RootConfig`, such as
   :meth:`RootConfig.get_key`, which follows one level of key alias.

## Example

```yaml
tokens:
  hsm:
    provider: /usr/lib/softhsm/libsofthsm2.so
    label: signing
pinfile: /etc/relic/pins.yml
keys:
  release:
    token: hsm
    label: release-2024
    roles: [release]
  current:
    alias: release
```

```python
from relic.config import read_file

config = read_file("/etc/relic/relic.yml")
key = config.get_key("current")
print(key.name, key.token_config.provider)
```

## Errors

Every failure derives from :class:`ConfigError`:

- :class:`ConfigIOError`: a file could not be read
- :class:`ConfigParseError`: malformed YAML or a value of the wrong type
- :class:`ConfigValidationError`: a bad fingerprint, or a key with no token
- :class:`ConfigNotFoundError`: a missing token, key, client or section

A load either succeeds completely or raises; there is no partial result.
"""

from relic.config.build import BuildInfo
from relic.config.errors import (
    ConfigError,
    ConfigIOError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
)
from relic.config.loader import parse_config, read_file
from relic.config.models import (
    AmqpConfig,
    ClientConfig,
    KeyConfig,
    RemoteConfig,
    RootConfig,
    ServerConfig,
    TimestampConfig,
    TokenConfig,
)
from relic.config.normalizer import normalize
from relic.config.pinfile import apply_pinfile, load_pinfile

__all__ = [
    # Loading
    "read_file",
    "parse_config",
    "normalize",
    "load_pinfile",
    "apply_pinfile",
    # Models
    "RootConfig",
    "TokenConfig",
    "KeyConfig",
    "ServerConfig",
    "ClientConfig",
    "RemoteConfig",
    "TimestampConfig",
    "AmqpConfig",
    "BuildInfo",
    # Errors
    "ConfigError",
    "ConfigIOError",
    "ConfigParseError",
    "ConfigValidationError",
    "ConfigNotFoundError",
]
