"""Integration tests for floor settings.

Updating folder and organization floor settings needs permissions beyond the
project, so those tests only run when `MA_FOLDER_ID` or `MA_ORGANIZATION_ID`
is set. Every floor setting that is enabled is reset afterwards.
"""

import os
from typing import Optional

import pytest

from langchain_google_model_armor import FilterSettings, RaiFilter
from langchain_google_model_armor.fixtures import ModelArmorTestResources
from langchain_google_model_armor.floor_settings import Scope

pytestmark = [
    pytest.mark.extended,
    pytest.mark.skipif(
        not os.environ.get("GOOGLE_CLOUD_PROJECT"),
        reason="GOOGLE_CLOUD_PROJECT env var not set. Skipping integration test.",
    ),
]


def _enable_and_check(
    resources: ModelArmorTestResources, scope: Scope, resource_id: Optional[str]
) -> None:
    resources.register_floor_setting_for_reset(scope, resource_id)

    updated = resources.floor_settings.enable_floor_setting(
        FilterSettings(
            rai_filters=[RaiFilter(filter_type="HATE_SPEECH", confidence_level="HIGH")]
        ),
        scope=scope,
        resource_id=resource_id,
    )

    assert updated.enable_floor_setting_enforcement
    fetched = resources.floor_settings.get_floor_setting(scope, resource_id)
    assert fetched.name == updated.name
    assert len(fetched.filter_config.rai_settings.rai_filters) == 1


def test_get_project_floor_setting(resources: ModelArmorTestResources) -> None:
    floor_setting = resources.floor_settings.get_floor_setting()

    assert floor_setting.name == (
        f"projects/{resources.settings.project}/locations/global/floorSetting"
    )


def test_update_project_floor_setting(resources: ModelArmorTestResources) -> None:
    _enable_and_check(resources, "projects", None)


@pytest.mark.skipif(
    not os.environ.get("MA_FOLDER_ID"),
    reason="MA_FOLDER_ID env var not set. Skipping folder floor setting test.",
)
def test_update_folder_floor_setting(resources: ModelArmorTestResources) -> None:
    _enable_and_check(resources, "folders", resources.settings.folder_id)


@pytest.mark.skipif(
    not os.environ.get("MA_ORGANIZATION_ID"),
    reason="MA_ORGANIZATION_ID env var not set. Skipping organization test.",
)
def test_update_organization_floor_setting(
    resources: ModelArmorTestResources,
) -> None:
    _enable_and_check(resources, "organizations", resources.settings.organization_id)
