from functools import lru_cache
from typing import Any, Optional

from google.api_core.client_options import ClientOptions
from google.auth import credentials
from google.cloud.dlp_v2 import DlpServiceClient
from google.cloud.modelarmor_v1 import ModelArmorClient

from langchain_google_model_armor._utils import get_client_info

_DEFAULT_LOCATION = "us-central1"
_GLOBAL_LOCATION = "global"


def model_armor_endpoint(location: Optional[str] = _DEFAULT_LOCATION) -> str:
    """Return the Model Armor API endpoint serving `location`.

    Regional resources live on `modelarmor.{location}.rep.googleapis.com`,
    the `global` location (floor settings) on the default endpoint.
    """
    if not location or location == _GLOBAL_LOCATION:
        return "modelarmor.googleapis.com"
    return f"modelarmor.{location}.rep.googleapis.com"


def dlp_endpoint(location: Optional[str] = _DEFAULT_LOCATION) -> str:
    """Return the Sensitive Data Protection endpoint serving `location`."""
    if not location or location == _GLOBAL_LOCATION:
        return "dlp.googleapis.com"
    return f"dlp.{location}.rep.googleapis.com"


def _client_kwargs(
    api_endpoint: str,
    credentials: Optional[credentials.Credentials],
    transport: Optional[str],
    client_options: Optional[ClientOptions],
    client_info: Optional[Any],
    module: str,
) -> dict:
    if client_options is None:
        client_options = ClientOptions(api_endpoint=api_endpoint)

    client_kwargs: dict = {
        "client_options": client_options,
        "client_info": client_info or get_client_info(module=module),
    }

    if credentials is not None:
        client_kwargs["credentials"] = credentials

    if transport is not None:
        client_kwargs["transport"] = transport

    return client_kwargs


@lru_cache
def _get_model_armor_client(
    location: str = _DEFAULT_LOCATION,
    credentials: Optional[credentials.Credentials] = None,
    transport: Optional[str] = None,
    client_options: Optional[ClientOptions] = None,
    client_info: Optional[Any] = None,
) -> ModelArmorClient:
    """
    Initialize the Model Armor client.

    Args:
        location: The location of the Model Armor client.
        credentials: Credentials to use when making API calls.
        transport: Desired API transport method, can be either `'grpc'` or `'rest'`.
        client_options: Client options for the API client.
        client_info: Client info for the API client.

    Returns:
        ModelArmorClient: The Model Armor client.
    """
    return ModelArmorClient(
        **_client_kwargs(
            model_armor_endpoint(location),
            credentials,
            transport,
            client_options,
            client_info,
            module="model-armor",
        )
    )


@lru_cache
def _get_dlp_client(
    location: str = _DEFAULT_LOCATION,
    credentials: Optional[credentials.Credentials] = None,
    transport: Optional[str] = None,
    client_options: Optional[ClientOptions] = None,
    client_info: Optional[Any] = None,
) -> DlpServiceClient:
    """
    Initialize the Sensitive Data Protection (DLP) client.

    Args:
        location: The location holding the DLP templates.
        credentials: Credentials to use when making API calls.
        transport: Desired API transport method, can be either `'grpc'` or `'rest'`.
        client_options: Client options for the API client.
        client_info: Client info for the API client.

    Returns:
        DlpServiceClient: The DLP client.
    """
    return DlpServiceClient(
        **_client_kwargs(
            dlp_endpoint(location),
            credentials,
            transport,
            client_options,
            client_info,
            module="dlp",
        )
    )
