"""
Samples to read and update Model Armor floor settings.

Floor settings set the minimum filters applied to every request in a
project, folder or organization.
"""

from google.cloud import modelarmor_v1

from langchain_google_model_armor import (
    FilterSettings,
    ModelArmorFloorSettingsManager,
    RaiFilter,
)
from langchain_google_model_armor.floor_settings import Scope


def get_floor_settings(
    scope: Scope = "projects", resource_id: str = "my-project"
) -> modelarmor_v1.FloorSetting:
    manager = ModelArmorFloorSettingsManager(project=resource_id)

    floor_setting = manager.get_floor_setting(scope, resource_id)
    print(floor_setting)
    return floor_setting


def update_floor_settings(
    scope: Scope = "projects", resource_id: str = "my-project"
) -> modelarmor_v1.FloorSetting:
    manager = ModelArmorFloorSettingsManager(project=resource_id)

    floor_setting = manager.enable_floor_setting(
        FilterSettings(
            rai_filters=[RaiFilter(filter_type="HATE_SPEECH", confidence_level="HIGH")]
        ),
        scope=scope,
        resource_id=resource_id,
    )
    print(f"Updated floor setting: {floor_setting.name}")
    return floor_setting


if __name__ == "__main__":
    get_floor_settings()
