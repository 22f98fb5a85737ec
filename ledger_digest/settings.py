"""Core configuration settings for ledger-digest.

@public

Settings are loaded from environment variables (prefix ``LEDGER_DIGEST_``) with
.env file support via pydantic-settings.

Environment variables:
    LEDGER_DIGEST_HEX_ACCEPT_UPPERCASE: Accept uppercase hex digits on decode (default true)
    LEDGER_DIGEST_HEX_ACCEPT_PREFIX: Accept a leading ``0x`` on decode (default false)
    LEDGER_DIGEST_LOG_LEVEL: Default level for ledger_digest loggers
    LEDGER_DIGEST_LOGGING_CONFIG: Path to a YAML logging configuration

Configuration precedence:
    1. Environment variables (highest priority)
    2. .env file in current directory
    3. Default values

Example:
    >>> from ledger_digest.settings import settings
    >>> settings.hex_accept_uppercase
    True

Note:
    Settings are loaded once at module import and frozen. Encoding is not
    configurable: digests always render as lowercase hex.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for ledger-digest.

    @public

    Attributes:
        hex_accept_uppercase: Whether ``decode_hex`` accepts ``A-F``. The invariant
                              check still applies to the decoded bytes.

        hex_accept_prefix: Whether ``decode_hex`` strips a single leading ``0x``.

        log_level: Level applied to the ``ledger_digest`` logger by the default
                   logging configuration.

        logging_config: Optional path to a YAML dictConfig file. Empty means the
                        built-in default configuration.
    """

    model_config = SettingsConfigDict(
        env_prefix="LEDGER_DIGEST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Textual decoding
    hex_accept_uppercase: bool = True
    hex_accept_prefix: bool = False

    # Logging
    log_level: str = "INFO"
    logging_config: str = ""


settings = Settings()
"""Global settings instance.

@public
"""
