# gcp_credcheck/exceptions.py
"""
Exceptions raised while loading configuration and resolving credentials.

Errors from the Google client libraries (``google.auth.exceptions``,
``googleapiclient.errors``) are not wrapped and propagate unchanged.
"""


class CredCheckError(Exception):
    """Base exception for all credcheck errors."""

    pass


class ConfigError(CredCheckError):
    """Configuration could not be loaded or validated."""

    pass


class CredentialsLoadError(ConfigError):
    """A configured access token or credentials file could not be read."""

    pass


class CredentialsParseError(ConfigError):
    """Configured credentials are not valid credentials JSON."""

    pass
