# gcp_credcheck/credentials.py
import json
import logging
import os
from dataclasses import dataclass
from typing import List, Tuple, Union

import google.auth
from google.oauth2 import credentials as oauth2_credentials
from google.oauth2 import service_account

from .exceptions import CredentialsLoadError, CredentialsParseError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StaticToken:
    token: str


@dataclass(frozen=True)
class ServiceAccountJSON:
    contents: str
    source: str


@dataclass(frozen=True)
class AmbientDefault:
    pass


CredentialStrategy = Union[StaticToken, ServiceAccountJSON, AmbientDefault]


def read_path_or_contents(value: str) -> Tuple[str, bool]:
    """
    Treat ``value`` as a file path if one exists there, otherwise as literal contents.

    Returns the contents and whether they were read from a file.
    """
    if not value:
        return value, False

    path = value
    if path.startswith("~"):
        path = os.path.expanduser(path)

    if os.path.exists(path):
        with open(path, encoding="utf-8") as f:
            return f.read(), True

    return value, False


def _credentials_from_info(info: dict, scopes: List[str]):
    credentials_type = info.get("type")
    if credentials_type == "service_account":
        return service_account.Credentials.from_service_account_info(info, scopes=scopes)
    if credentials_type == "authorized_user":
        return oauth2_credentials.Credentials.from_authorized_user_info(info, scopes=scopes)
    raise ValueError(f"unsupported credentials type: {credentials_type!r}")


def select_strategy(config) -> CredentialStrategy:
    """Pick the first configured credential source: access token, credentials JSON, ambient default."""
    if config.access_token:
        try:
            contents, was_path = read_path_or_contents(config.access_token)
        except (OSError, UnicodeDecodeError) as e:
            raise CredentialsLoadError(f"Error loading access token: {str(e)}") from e
        return StaticToken(token=contents.strip() if was_path else contents)

    if config.credentials:
        try:
            contents, was_path = read_path_or_contents(config.credentials)
        except (OSError, UnicodeDecodeError) as e:
            raise CredentialsLoadError(f"Error loading credentials: {str(e)}") from e
        # Inline JSON carries private keys, so only a file path is safe to echo
        source = config.credentials if was_path else "<inline JSON>"
        return ServiceAccountJSON(contents=contents, source=source)

    return AmbientDefault()


def get_token_source(config, scopes: List[str]):
    """Resolve ``config`` into a google-auth credentials object scoped to ``scopes``."""
    strategy = select_strategy(config)

    if isinstance(strategy, StaticToken):
        logger.info("Authenticating using configured Google JSON 'access_token'...")
        logger.info(f"  -- Scopes: {scopes}")
        # No refresh token: the credential is used as-is until it expires upstream
        return oauth2_credentials.Credentials(token=strategy.token, scopes=scopes)

    if isinstance(strategy, ServiceAccountJSON):
        try:
            info = json.loads(strategy.contents)
            if not isinstance(info, dict):
                raise ValueError("expected a JSON object")
            credentials = _credentials_from_info(info, scopes)
        except ValueError as e:
            raise CredentialsParseError(
                f"Unable to parse credentials from '{strategy.source}': {str(e)}"
            ) from e

        logger.info("Authenticating using configured Google JSON 'credentials'...")
        logger.info(f"  -- Scopes: {scopes}")
        return credentials

    logger.info("Authenticating using DefaultClient...")
    logger.info(f"  -- Scopes: {scopes}")
    credentials, _ = google.auth.default(scopes=scopes)
    return credentials
