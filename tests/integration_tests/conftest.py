"""
Shared fixtures for Model Armor integration tests.

Environment variables:
- GOOGLE_CLOUD_PROJECT (Required): The Google Cloud project ID where Model Armor
    and Sensitive Data Protection are enabled.
- GOOGLE_CLOUD_LOCATION (Optional): The Model Armor location
    (default: "us-central1").
- DLP_INSPECT_TEMPLATE_ID / DLP_DEIDENTIFY_TEMPLATE_ID (Optional): Existing DLP
    templates for advanced SDP tests. Temporary ones are created otherwise.
- MA_FOLDER_ID / MA_ORGANIZATION_ID (Optional): Enable folder and organization
    floor setting tests.

Tests will be skipped if the required environment variable is not set.
"""

from typing import Generator

import pytest

from langchain_google_model_armor import ModelArmorSanitizer
from langchain_google_model_armor.fixtures import (
    ModelArmorTestResources,
    ModelArmorTestSettings,
)


@pytest.fixture(scope="module")
def settings() -> ModelArmorTestSettings:
    return ModelArmorTestSettings.from_env()


@pytest.fixture(scope="module")
def resources(
    settings: ModelArmorTestSettings,
) -> Generator[ModelArmorTestResources, None, None]:
    """Resources created by a test module, deleted once the module finishes."""
    with ModelArmorTestResources(settings) as resources:
        yield resources


@pytest.fixture()
def sanitizer(settings: ModelArmorTestSettings) -> ModelArmorSanitizer:
    return ModelArmorSanitizer(project=settings.project, location=settings.location)
