"""Exceptions raised while loading and querying relic configuration."""


class ConfigError(Exception):
    """Base class for all configuration errors."""

    pass


class ConfigIOError(ConfigError, OSError):
    """Raised when a configuration file or pinfile cannot be read."""

    pass


class ConfigParseError(ConfigError, ValueError):
    """Raised when a document is not well-formed or a value has the wrong shape."""

    pass


class ConfigValidationError(ConfigError, ValueError):
    """Raised when the configuration violates a structural invariant.

    Examples are a client fingerprint that is not a hex-encoded SHA-256
    digest, or a key that resolves without naming a token.
    """

    pass


class ConfigNotFoundError(ConfigError, LookupError):
    """Raised when a requested token, key, client or section is not configured."""

    pass
