"""Shared helpers for Model Armor clients."""

from __future__ import annotations

import os
import re
from importlib import metadata
from typing import Optional, Tuple

from google.api_core.gapic_v1.client_info import ClientInfo

_PACKAGE_NAME = "langchain-google-model-armor"
_TELEMETRY_TAG = "remote_reasoning_engine"
_TELEMETRY_ENV_VARIABLE_NAME = "GOOGLE_CLOUD_AGENT_ENGINE_ID"

_LOCATION_NAME_RE = re.compile(
    r"^projects/(?P<project>[^/]+)/locations/(?P<location>[^/]+)$"
)


def get_user_agent(module: Optional[str] = None) -> Tuple[str, str]:
    r"""Returns a custom user agent header.

    Args:
        module: The module for a custom user agent header.
    """
    try:
        package_version = metadata.version(_PACKAGE_NAME)
    except metadata.PackageNotFoundError:
        package_version = "0.0.0"
    client_library_version = (
        f"{package_version}-{module}" if module else package_version
    )
    if os.environ.get(_TELEMETRY_ENV_VARIABLE_NAME):
        client_library_version += f"+{_TELEMETRY_TAG}"
    return (
        client_library_version,
        f"{_PACKAGE_NAME}/{client_library_version}",
    )


def get_client_info(module: Optional[str] = None) -> "ClientInfo":
    r"""Returns a client info object with a custom user agent header.

    Args:
        module: The module for a custom user agent header.
    """
    client_library_version, user_agent = get_user_agent(module)
    return ClientInfo(
        client_library_version=client_library_version,
        user_agent=user_agent,
    )


def location_path(project: str, location: str) -> str:
    """Return the `projects/{project}/locations/{location}` parent name."""
    if not project or not location:
        raise ValueError("Both project and location are required.")
    return f"projects/{project}/locations/{location}"


def parse_location_path(name: str) -> Tuple[str, str]:
    """Split a parent resource name into `(project, location)`."""
    match = _LOCATION_NAME_RE.match(name)
    if not match:
        raise ValueError(
            f"Invalid location name {name!r}, expected "
            "'projects/{project}/locations/{location}'."
        )
    return match.group("project"), match.group("location")


def resolve_resource_name(
    value: str, parent: str, collection: str
) -> str:
    """Expand a bare resource ID into a full name under `parent`.

    Values that already look like full resource names are validated against
    the expected collection and returned unchanged.

    Args:
        value: A resource ID (`my-template`) or full resource name.
        parent: The `projects/{project}/locations/{location}` parent.
        collection: The collection segment, e.g. `templates`.

    Returns:
        The full resource name.

    Raises:
        ValueError: If `value` is empty or a malformed resource name.
    """
    if not value:
        raise ValueError(f"A {collection} ID or resource name is required.")
    if "/" not in value:
        return f"{parent}/{collection}/{value}"

    parts = value.split("/")
    if (
        len(parts) != 6
        or parts[0] != "projects"
        or parts[2] != "locations"
        or parts[4] != collection
        or not all(parts)
    ):
        raise ValueError(
            f"Invalid resource name {value!r}, expected "
            f"'projects/{{project}}/locations/{{location}}/{collection}/{{id}}'."
        )
    return value
