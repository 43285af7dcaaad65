"""Connection parameters shared by the Model Armor facades."""

import logging
import os
from typing import Any, Optional

import google.auth
from google.api_core.client_options import ClientOptions
from google.auth import credentials as google_auth_credentials
from pydantic import BaseModel, Field, model_validator

from langchain_google_model_armor import _client_utils
from langchain_google_model_armor._utils import location_path

_DEFAULT_LOCATION = "us-central1"

PROJECT_ENV_VARS = ("GOOGLE_CLOUD_PROJECT", "GOOGLE_PROJECT_ID")
LOCATION_ENV_VAR = "GOOGLE_CLOUD_LOCATION"

logger = logging.getLogger(__name__)


def default_location() -> str:
    """Location from `GOOGLE_CLOUD_LOCATION`, or `us-central1`."""
    return os.getenv(LOCATION_ENV_VAR) or _DEFAULT_LOCATION


def project_from_env() -> Optional[str]:
    """First non-empty project ID found in the supported environment variables."""
    for name in PROJECT_ENV_VARS:
        value = os.getenv(name)
        if value:
            return value
    return None


class ModelArmorParams(BaseModel):
    """Model Armor connection parameters.

    A ready client can be supplied through `client`; otherwise one is built
    from the remaining fields on first validation.
    """

    model_config = {"arbitrary_types_allowed": True}

    project: Optional[str] = Field(
        default=None,
        description="The default GCP project to use when making Model Armor API calls.",
    )

    location: str = Field(
        default_factory=default_location,
        description="The default location to use when making API calls.",
    )

    credentials: Optional[google_auth_credentials.Credentials] = Field(
        default=None,
        description="The default custom credentials to use when making API calls.",
    )

    transport: Optional[str] = Field(
        default=None,
        description="The desired API transport method, can be either 'grpc' or 'rest'.",
    )

    client_options: Optional[ClientOptions] = Field(
        default=None, exclude=True, description="Client options for the API client."
    )

    client_info: Optional[Any] = Field(
        default=None, exclude=True, description="Client info for the API client."
    )

    client: Any = Field(default=None, exclude=True)

    @model_validator(mode="after")
    def validate_project(self) -> "ModelArmorParams":
        """
        Validate the project ID.

        If not provided, will attempt to infer via credentials file, env or ADC.
        """
        if not self.project:
            # Get Project ID from credentials.
            if self.credentials and getattr(self.credentials, "project_id", None):
                self.project = self.credentials.project_id
            # Get Project ID from env variables.
            elif project_from_env():
                self.project = project_from_env()
            # Get Project ID using ADC.
            else:
                _, self.project = google.auth.default()

            if not self.project:
                raise ValueError(
                    "Unable to get GCP Project ID. Please set it explicitly or "
                    "use the supported auth methods."
                )
        return self

    @model_validator(mode="after")
    def validate_client(self) -> "ModelArmorParams":
        """Build the API client when none was supplied."""
        if self.client is None:
            self.client = self._create_client()
            logger.debug(
                "Initialized %s client for project %s in %s",
                self.__class__.__name__,
                self.project,
                self.location,
            )
        return self

    def _create_client(self) -> Any:
        return _client_utils._get_model_armor_client(
            location=self.location,
            credentials=self.credentials,
            transport=self.transport,
            client_options=self.client_options,
            client_info=self.client_info,
        )

    @property
    def parent(self) -> str:
        """The `projects/{project}/locations/{location}` parent resource name."""
        return location_path(str(self.project), self.location)
