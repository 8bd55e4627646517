# gcp_credcheck/config.py
import logging
import os
import re
from typing import Any, List

from googleapiclient import discovery
from googleapiclient.http import set_user_agent
from pydantic import BaseModel, field_validator

from .credentials import get_token_source
from .transport import build_http, user_agent_string

logger = logging.getLogger(__name__)

# Checked in order, first non-empty wins
CREDENTIALS_ENV_VARS = [
    "GOOGLE_CREDENTIALS",
    "GOOGLE_CLOUD_KEYFILE_JSON",
    "GOOGLE_KEYFILE_JSON",
]
ACCESS_TOKEN_ENV_VAR = "GOOGLE_OAUTH_ACCESS_TOKEN"
SCOPES_ENV_VAR = "GOOGLE_OAUTH_SCOPES"

DEFAULT_CLIENT_SCOPES = [
    "https://www.googleapis.com/auth/compute",
    "https://www.googleapis.com/auth/cloud-platform",
    "https://www.googleapis.com/auth/ndev.clouddns.readwrite",
    "https://www.googleapis.com/auth/devstorage.full_control",
]


class Config(BaseModel):
    credentials: str = ""
    access_token: str = ""
    scopes: List[str] = []

    # Populated by load_and_validate()
    token_source: Any = None
    http: Any = None
    user_agent: str = ""
    client_billing: Any = None
    client_resource_manager: Any = None

    @field_validator("scopes", mode="before")
    @classmethod
    def split_scopes(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            return [s for s in re.split(r"[,\s]+", v) if s]
        return v

    def load_and_validate(self) -> None:
        """Resolve credentials and build the authorized transport and API clients."""
        if not self.scopes:
            self.scopes = list(DEFAULT_CLIENT_SCOPES)

        self.token_source = get_token_source(self, self.scopes)

        self.user_agent = user_agent_string()
        self.http = set_user_agent(build_http(self.token_source), self.user_agent)

        logger.info("Instantiating Google Cloud ResourceManager Client...")
        self.client_resource_manager = discovery.build(
            "cloudresourcemanager", "v1", http=self.http, cache_discovery=False, static_discovery=True
        )

        logger.info("Instantiating Google Cloud Billing Client...")
        self.client_billing = discovery.build(
            "cloudbilling", "v1", http=self.http, cache_discovery=False, static_discovery=True
        )


def config_from_env() -> Config:
    """Build a Config from the process environment. Missing variables leave fields empty."""
    credentials = ""
    for var in CREDENTIALS_ENV_VARS:
        credentials = os.getenv(var, "")
        if credentials:
            break

    return Config(
        credentials=credentials,
        access_token=os.getenv(ACCESS_TOKEN_ENV_VAR, ""),
        scopes=os.getenv(SCOPES_ENV_VAR, ""),
    )
