"""
Floor settings: the baseline filters enforced across a project, folder or
organization regardless of template.

Floor settings live in the `global` location and are served by the
non-regional Model Armor endpoint.
"""

import logging
from typing import Literal, Optional, Sequence, cast

from google.cloud import modelarmor_v1
from google.protobuf import field_mask_pb2
from pydantic import Field

from langchain_google_model_armor.config import ModelArmorParams
from langchain_google_model_armor.filters import FilterSettings

logger = logging.getLogger(__name__)

Scope = Literal["projects", "folders", "organizations"]

_SCOPES = ("projects", "folders", "organizations")


def floor_setting_path(scope: Scope, resource_id: str) -> str:
    """`{scope}/{resource_id}/locations/global/floorSetting`."""
    if scope not in _SCOPES:
        raise ValueError(
            f"Invalid floor setting scope {scope!r}, expected one of "
            f"{', '.join(_SCOPES)}."
        )
    if not resource_id:
        raise ValueError(f"A {scope[:-1]} ID is required.")
    return f"{scope}/{resource_id}/locations/global/floorSetting"


class ModelArmorFloorSettingsManager(ModelArmorParams):
    """Read, update and reset floor settings.

    `project` is only used as the default resource for the `projects` scope;
    folder and organization floor settings take their ID explicitly.
    """

    location: str = Field(default="global")

    def _name(self, scope: Scope, resource_id: Optional[str]) -> str:
        if scope == "projects" and not resource_id:
            resource_id = self.project
        return floor_setting_path(scope, cast(str, resource_id))

    @property
    def _client(self) -> modelarmor_v1.ModelArmorClient:
        return cast(modelarmor_v1.ModelArmorClient, self.client)

    def get_floor_setting(
        self, scope: Scope = "projects", resource_id: Optional[str] = None
    ) -> modelarmor_v1.FloorSetting:
        """Fetch the floor setting of a project, folder or organization."""
        request = modelarmor_v1.GetFloorSettingRequest(
            name=self._name(scope, resource_id)
        )
        return self._client.get_floor_setting(request=request)

    def update_floor_setting(
        self,
        floor_setting: modelarmor_v1.FloorSetting,
        update_mask: Optional[Sequence[str]] = None,
    ) -> modelarmor_v1.FloorSetting:
        """Send an updated floor setting; `floor_setting.name` selects the target."""
        if not floor_setting.name:
            raise ValueError("The floor setting to update has no resource name.")
        request = modelarmor_v1.UpdateFloorSettingRequest(floor_setting=floor_setting)
        if update_mask:
            request.update_mask = field_mask_pb2.FieldMask(paths=list(update_mask))
        response = self._client.update_floor_setting(request=request)
        logger.info("Updated floor setting %s", response.name)
        return response

    def enable_floor_setting(
        self,
        filters: FilterSettings,
        scope: Scope = "projects",
        resource_id: Optional[str] = None,
    ) -> modelarmor_v1.FloorSetting:
        """Enforce `filters` as the floor for the given scope."""
        floor_setting = modelarmor_v1.FloorSetting(
            name=self._name(scope, resource_id),
            filter_config=filters.to_proto(),
            enable_floor_setting_enforcement=True,
        )
        return self.update_floor_setting(floor_setting)

    def reset_floor_setting(
        self, scope: Scope = "projects", resource_id: Optional[str] = None
    ) -> modelarmor_v1.FloorSetting:
        """Clear the floor filters and turn enforcement off."""
        floor_setting = modelarmor_v1.FloorSetting(
            name=self._name(scope, resource_id),
            filter_config=modelarmor_v1.FilterConfig(
                rai_settings=modelarmor_v1.RaiFilterSettings(rai_filters=[])
            ),
            enable_floor_setting_enforcement=False,
        )
        return self.update_floor_setting(floor_setting)
