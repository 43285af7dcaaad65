from unittest.mock import MagicMock

import pytest
from google.cloud import modelarmor_v1

from langchain_google_model_armor import FilterSettings, RaiFilter
from langchain_google_model_armor.floor_settings import (
    ModelArmorFloorSettingsManager,
    floor_setting_path,
)


@pytest.fixture
def mock_client() -> MagicMock:
    client = MagicMock()
    client.update_floor_setting.side_effect = lambda request: request.floor_setting
    return client


@pytest.fixture
def manager(mock_client: MagicMock) -> ModelArmorFloorSettingsManager:
    return ModelArmorFloorSettingsManager(project="test-project", client=mock_client)


@pytest.mark.parametrize(
    "scope,resource_id,expected",
    [
        (
            "projects",
            "test-project",
            "projects/test-project/locations/global/floorSetting",
        ),
        ("folders", "123", "folders/123/locations/global/floorSetting"),
        ("organizations", "456", "organizations/456/locations/global/floorSetting"),
    ],
)
def test_floor_setting_path(scope: str, resource_id: str, expected: str) -> None:
    assert floor_setting_path(scope, resource_id) == expected  # type: ignore[arg-type]


def test_floor_setting_path_rejects_unknown_scope() -> None:
    with pytest.raises(ValueError, match="Invalid floor setting scope"):
        floor_setting_path("billingAccounts", "1")  # type: ignore[arg-type]


def test_floor_setting_path_requires_id() -> None:
    with pytest.raises(ValueError, match="folder ID is required"):
        floor_setting_path("folders", "")


def test_manager_defaults_to_global_location(
    manager: ModelArmorFloorSettingsManager,
) -> None:
    assert manager.location == "global"


def test_get_project_floor_setting_defaults_to_own_project(
    manager: ModelArmorFloorSettingsManager, mock_client: MagicMock
) -> None:
    mock_client.get_floor_setting.return_value = modelarmor_v1.FloorSetting(
        name="projects/test-project/locations/global/floorSetting"
    )

    floor_setting = manager.get_floor_setting()

    request = mock_client.get_floor_setting.call_args.kwargs["request"]
    assert request.name == "projects/test-project/locations/global/floorSetting"
    assert floor_setting.name == request.name


def test_get_folder_floor_setting(
    manager: ModelArmorFloorSettingsManager, mock_client: MagicMock
) -> None:
    manager.get_floor_setting("folders", "123")

    request = mock_client.get_floor_setting.call_args.kwargs["request"]
    assert request.name == "folders/123/locations/global/floorSetting"


def test_get_folder_floor_setting_requires_id(
    manager: ModelArmorFloorSettingsManager, mock_client: MagicMock
) -> None:
    with pytest.raises(ValueError):
        manager.get_floor_setting("folders")
    mock_client.get_floor_setting.assert_not_called()


def test_enable_floor_setting(
    manager: ModelArmorFloorSettingsManager, mock_client: MagicMock
) -> None:
    floor_setting = manager.enable_floor_setting(
        FilterSettings(
            rai_filters=[RaiFilter(filter_type="HATE_SPEECH", confidence_level="HIGH")]
        ),
        scope="organizations",
        resource_id="456",
    )

    request = mock_client.update_floor_setting.call_args.kwargs["request"]
    assert "update_mask" not in request
    assert floor_setting.name == "organizations/456/locations/global/floorSetting"
    assert floor_setting.enable_floor_setting_enforcement
    rai_filters = floor_setting.filter_config.rai_settings.rai_filters
    assert rai_filters[0].filter_type == modelarmor_v1.RaiFilterType.HATE_SPEECH


def test_update_floor_setting_with_mask(
    manager: ModelArmorFloorSettingsManager, mock_client: MagicMock
) -> None:
    manager.update_floor_setting(
        modelarmor_v1.FloorSetting(
            name="projects/test-project/locations/global/floorSetting",
            enable_floor_setting_enforcement=True,
        ),
        update_mask=["enable_floor_setting_enforcement"],
    )

    request = mock_client.update_floor_setting.call_args.kwargs["request"]
    assert list(request.update_mask.paths) == ["enable_floor_setting_enforcement"]


def test_update_floor_setting_requires_name(
    manager: ModelArmorFloorSettingsManager,
) -> None:
    with pytest.raises(ValueError, match="no resource name"):
        manager.update_floor_setting(modelarmor_v1.FloorSetting())


def test_reset_floor_setting(
    manager: ModelArmorFloorSettingsManager, mock_client: MagicMock
) -> None:
    floor_setting = manager.reset_floor_setting("folders", "123")

    assert floor_setting.name == "folders/123/locations/global/floorSetting"
    assert not floor_setting.enable_floor_setting_enforcement
    assert len(floor_setting.filter_config.rai_settings.rai_filters) == 0
