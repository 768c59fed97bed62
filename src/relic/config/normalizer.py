import logging
import re

from relic.config.errors import ConfigValidationError
from relic.config.models import DEFAULT_TOKEN_TYPE, ClientConfig, RootConfig
from relic.config.pinfile import apply_pinfile

logger = logging.getLogger(__name__)

__all__ = ["normalize"]

FINGERPRINT_PATTERN = re.compile(r"[0-9A-Fa-f]{64}")


def _normalize_clients(config: RootConfig) -> None:
    if config.clients is None:
        return
    normalized: dict[str, ClientConfig] = {}
    for fingerprint, client in config.clients.items():
        if not FINGERPRINT_PATTERN.fullmatch(fingerprint):
            raise ConfigValidationError(
                "client keys must be hex-encoded 256-bit digests of the public key, "
                f"got '{fingerprint}'"
            )
        # Differently-cased duplicates collapse; the last one wins
        normalized[fingerprint.lower()] = client
    config.clients = normalized


def _finalize_tokens(config: RootConfig) -> None:
    for token_name, token in (config.tokens or {}).items():
        token._set_name(token_name)
        if not token.type:
            token.type = DEFAULT_TOKEN_TYPE


def _finalize_keys(config: RootConfig) -> None:
    tokens = config.tokens or {}
    for key_name, key in (config.keys or {}).items():
        key._bind(key_name, config)
        if key.token and key.token not in tokens:
            # Surfaces later, when something needs the key's token
            logger.debug("Key '%s' refers to undefined token '%s'", key_name, key.token)


def normalize(config: RootConfig) -> RootConfig:
    """Finish a freshly parsed configuration.

    Steps, in order:

    1. Lower-case client fingerprints and check that they are SHA-256 hex digests
    2. Merge PINs from the pinfile, if one is configured
    3. Name every token and default its type to ``pkcs11``
    4. Name every key and link it to the configuration that holds its token

    The pass is idempotent, so running it on an already normalized
    configuration changes nothing.

    Args:
        config: The configuration to normalize in place

    Returns:
        The same configuration object

    Raises:
        ConfigValidationError: If a client fingerprint is malformed
        ConfigIOError: If the pinfile cannot be read
        ConfigParseError: If the pinfile is malformed
    """
    _normalize_clients(config)
    apply_pinfile(config)
    _finalize_tokens(config)
    _finalize_keys(config)
    logger.debug(
        "Normalized configuration: %d token(s), %d key(s), %d client(s)",
        len(config.tokens or {}),
        len(config.keys or {}),
        len(config.clients or {}),
    )
    return config
