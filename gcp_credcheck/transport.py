# gcp_credcheck/transport.py
import logging

import google.auth
import google_auth_httplib2
from googleapiclient import version as googleapiclient_version
import httplib2

from . import __version__

logger = logging.getLogger(__name__)

# Bounds a single HTTP request, not a whole logical API call
REQUEST_TIMEOUT_SECONDS = 30

LOG_PREFIX = "Google"

REDACTED_HEADERS = {"authorization", "x-goog-api-key"}


def _redact(headers) -> dict:
    return {
        k: ("<redacted>" if str(k).lower() in REDACTED_HEADERS else v)
        for k, v in (headers or {}).items()
    }


class LoggingHttp(httplib2.Http):
    """httplib2 transport that logs every request and response at DEBUG."""

    def request(self, uri, method="GET", body=None, headers=None,
                redirections=httplib2.DEFAULT_MAX_REDIRECTS, connection_type=None):
        logger.debug(f"[{LOG_PREFIX}] Request: {method} {uri}")
        logger.debug(f"[{LOG_PREFIX}]   -- Headers: {_redact(headers)}")

        response, content = super().request(
            uri,
            method=method,
            body=body,
            headers=headers,
            redirections=redirections,
            connection_type=connection_type,
        )

        logger.debug(f"[{LOG_PREFIX}] Response: {response.status} {method} {uri}")
        logger.debug(f"[{LOG_PREFIX}]   -- Headers: {_redact(dict(response))}")
        return response, content


def build_http(token_source, timeout: int = REQUEST_TIMEOUT_SECONDS):
    """Wrap a logging transport with the given credentials."""
    return google_auth_httplib2.AuthorizedHttp(token_source, http=LoggingHttp(timeout=timeout))


def user_agent_string() -> str:
    return " ".join([
        f"gcp-credcheck/{__version__}",
        f"google-api-python-client/{googleapiclient_version.__version__}",
        f"google-auth/{google.auth.__version__}",
        f"httplib2/{httplib2.__version__}",
    ])
