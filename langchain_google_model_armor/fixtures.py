"""
Provisioning and teardown of the remote resources Model Armor tests need.

`ModelArmorTestResources` creates templates (and the DLP templates advanced
SDP templates depend on), remembers what it created, and deletes everything
in `cleanup()`. Cleanup never raises: errors are logged so they cannot mask
the failure of the test that is being torn down.

The cleanup list is not thread-safe.
"""

import logging
import os
import time
import uuid
from typing import Any, Callable, Dict, List, Optional, Tuple

from google.api_core import retry
from google.api_core.exceptions import NotFound
from google.cloud import modelarmor_v1
from pydantic import BaseModel, Field

from langchain_google_model_armor.config import default_location, project_from_env
from langchain_google_model_armor.dlp import DlpTemplateManager
from langchain_google_model_armor.filters import (
    AdvancedSdpConfig,
    BasicSdpConfig,
    DetectionConfidenceLevel,
    FilterSettings,
    RaiFilter,
    RaiFilterType,
    TemplateMetadata,
    TemplateSpec,
)
from langchain_google_model_armor.floor_settings import (
    ModelArmorFloorSettingsManager,
    Scope,
)
from langchain_google_model_armor.templates import (
    ModelArmorTemplateManager,
    TemplateLike,
)

logger = logging.getLogger(__name__)

DLP_INSPECT_TEMPLATE_ENV_VAR = "DLP_INSPECT_TEMPLATE_ID"
DLP_DEIDENTIFY_TEMPLATE_ENV_VAR = "DLP_DEIDENTIFY_TEMPLATE_ID"
FOLDER_ENV_VAR = "MA_FOLDER_ID"
ORGANIZATION_ENV_VAR = "MA_ORGANIZATION_ID"

DEFAULT_LABELS = {"key1": "value1", "key2": "value2"}

# Pause before each cleanup call to stay under the API rate limits.
_SETTLE_SECONDS = 2.0


class ModelArmorTestSettings(BaseModel):
    """Environment-driven settings for tests against a live project."""

    project: str
    location: str = Field(default_factory=default_location)
    inspect_template_id: Optional[str] = None
    deidentify_template_id: Optional[str] = None
    folder_id: Optional[str] = None
    organization_id: Optional[str] = None

    @classmethod
    def from_env(cls) -> "ModelArmorTestSettings":
        """Read the settings, requiring a project ID.

        Raises:
            ValueError: If no project environment variable is set.
        """
        project = project_from_env()
        if not project:
            raise ValueError(
                "Missing GOOGLE_CLOUD_PROJECT environment variable."
            )
        return cls(
            project=project,
            inspect_template_id=os.getenv(DLP_INSPECT_TEMPLATE_ENV_VAR) or None,
            deidentify_template_id=os.getenv(DLP_DEIDENTIFY_TEMPLATE_ENV_VAR) or None,
            folder_id=os.getenv(FOLDER_ENV_VAR) or None,
            organization_id=os.getenv(ORGANIZATION_ENV_VAR) or None,
        )


def generate_unique_id() -> str:
    """Short random suffix for resource IDs."""
    return uuid.uuid4().hex[:8]


@retry.Retry()
def _retry_create_template(
    templates: ModelArmorTemplateManager, template: TemplateLike, template_id: str
) -> modelarmor_v1.Template:
    return templates.create_template(template, template_id=template_id)


class ModelArmorTestResources:
    """Creates Model Armor test resources and tears them down again.

    Args:
        settings: Project, location and optional pre-existing DLP templates.
        templates: Template manager; built from `settings` when omitted.
        dlp: DLP template manager; built lazily when omitted.
        floor_settings: Floor settings manager; built lazily when omitted.
        settle_seconds: Pause before each cleanup delete.
    """

    def __init__(
        self,
        settings: ModelArmorTestSettings,
        templates: Optional[ModelArmorTemplateManager] = None,
        dlp: Optional[DlpTemplateManager] = None,
        floor_settings: Optional[ModelArmorFloorSettingsManager] = None,
        settle_seconds: float = _SETTLE_SECONDS,
    ) -> None:
        self.settings = settings
        self.templates = templates or ModelArmorTemplateManager(
            project=settings.project, location=settings.location
        )
        self._dlp = dlp
        self._floor_settings = floor_settings
        self.settle_seconds = settle_seconds

        self._templates_to_cleanup: List[str] = []
        self._created_inspect_template: Optional[str] = None
        self._created_deidentify_template: Optional[str] = None
        self._floor_settings_to_reset: List[Dict[str, Any]] = []

    @property
    def dlp(self) -> DlpTemplateManager:
        if self._dlp is None:
            self._dlp = DlpTemplateManager(
                project=self.settings.project, location=self.settings.location
            )
        return self._dlp

    @property
    def floor_settings(self) -> ModelArmorFloorSettingsManager:
        if self._floor_settings is None:
            self._floor_settings = ModelArmorFloorSettingsManager(
                project=self.settings.project
            )
        return self._floor_settings

    def new_template_id(self, prefix: str = "test") -> str:
        return f"{prefix}-{generate_unique_id()}"

    # Template configurations.

    @staticmethod
    def base_filters() -> FilterSettings:
        """RAI filters shared by all test templates."""
        return FilterSettings(
            rai_filters=[
                RaiFilter(
                    filter_type=RaiFilterType.DANGEROUS,
                    confidence_level=DetectionConfidenceLevel.HIGH,
                ),
                RaiFilter(
                    filter_type=RaiFilterType.HATE_SPEECH,
                    confidence_level=DetectionConfidenceLevel.MEDIUM_AND_ABOVE,
                ),
                RaiFilter(
                    filter_type=RaiFilterType.SEXUALLY_EXPLICIT,
                    confidence_level=DetectionConfidenceLevel.MEDIUM_AND_ABOVE,
                ),
                RaiFilter(
                    filter_type=RaiFilterType.HARASSMENT,
                    confidence_level=DetectionConfidenceLevel.MEDIUM_AND_ABOVE,
                ),
            ]
        )

    def configure_base_template(self) -> TemplateSpec:
        return TemplateSpec(filters=self.base_filters())

    def configure_basic_sdp_template(self) -> TemplateSpec:
        spec = self.configure_base_template()
        spec.filters.sdp = BasicSdpConfig()
        return spec

    def configure_advanced_sdp_template(self) -> TemplateSpec:
        """Base filters plus advanced SDP using the test DLP templates.

        Creates the DLP templates first unless the settings name existing ones.
        """
        inspect_template, deidentify_template = self.ensure_dlp_templates()
        spec = self.configure_base_template()
        spec.filters.sdp = AdvancedSdpConfig(
            inspect_template=inspect_template,
            deidentify_template=deidentify_template,
        )
        return spec

    def configure_malicious_uri_template(self) -> TemplateSpec:
        return TemplateSpec(filters=FilterSettings(malicious_uri_enabled=True))

    def configure_template_with_labels(
        self, labels: Optional[Dict[str, str]] = None
    ) -> TemplateSpec:
        spec = self.configure_base_template()
        spec.labels = dict(DEFAULT_LABELS if labels is None else labels)
        return spec

    def configure_template_with_metadata(self) -> TemplateSpec:
        spec = self.configure_base_template()
        spec.metadata = TemplateMetadata(
            log_template_operations=True, log_sanitize_operations=True
        )
        return spec

    # Remote resources.

    def create_template(
        self, template: TemplateLike, template_id: Optional[str] = None
    ) -> modelarmor_v1.Template:
        """Create a template and register it for cleanup."""
        template_id = template_id or self.new_template_id()
        created = _retry_create_template(self.templates, template, template_id)
        self.register_template_for_cleanup(created.name)
        return created

    def create_base_template(
        self, template_id: Optional[str] = None
    ) -> modelarmor_v1.Template:
        return self.create_template(self.configure_base_template(), template_id)

    def create_basic_sdp_template(
        self, template_id: Optional[str] = None
    ) -> modelarmor_v1.Template:
        return self.create_template(self.configure_basic_sdp_template(), template_id)

    def create_advanced_sdp_template(
        self, template_id: Optional[str] = None
    ) -> modelarmor_v1.Template:
        return self.create_template(
            self.configure_advanced_sdp_template(), template_id
        )

    def create_malicious_uri_template(
        self, template_id: Optional[str] = None
    ) -> modelarmor_v1.Template:
        return self.create_template(
            self.configure_malicious_uri_template(), template_id
        )

    def create_template_with_labels(
        self, template_id: Optional[str] = None
    ) -> modelarmor_v1.Template:
        return self.create_template(self.configure_template_with_labels(), template_id)

    def register_template_for_cleanup(self, template: str) -> None:
        """Delete `template` (ID or full name) during `cleanup()`."""
        if not template:
            return
        name = self.templates.template_path(template)
        if name not in self._templates_to_cleanup:
            self._templates_to_cleanup.append(name)

    def delete_template(self, template: str) -> None:
        """Delete a template now and drop it from the cleanup list.

        Unlike `cleanup()`, errors propagate.
        """
        name = self.templates.template_path(template)
        self.templates.delete_template(name)
        if name in self._templates_to_cleanup:
            self._templates_to_cleanup.remove(name)

    def ensure_dlp_templates(self) -> Tuple[str, str]:
        """Return `(inspect_template_name, deidentify_template_name)`.

        Uses the DLP templates named in the settings, creating (and later
        deleting) fresh ones for whichever is not configured.
        """
        inspect_id = self.settings.inspect_template_id
        if not inspect_id:
            if not self._created_inspect_template:
                template_id = self.new_template_id("dlp-inspect")
                self.dlp.create_inspect_template(template_id)
                self._created_inspect_template = template_id
            inspect_id = self._created_inspect_template

        deidentify_id = self.settings.deidentify_template_id
        if not deidentify_id:
            if not self._created_deidentify_template:
                template_id = self.new_template_id("dlp-deidentify")
                self.dlp.create_deidentify_template(template_id)
                self._created_deidentify_template = template_id
            deidentify_id = self._created_deidentify_template

        return (
            self.dlp.inspect_template_path(inspect_id),
            self.dlp.deidentify_template_path(deidentify_id),
        )

    def register_floor_setting_for_reset(
        self, scope: Scope = "projects", resource_id: Optional[str] = None
    ) -> None:
        """Reset the floor setting of the given scope during `cleanup()`."""
        entry = {"scope": scope, "resource_id": resource_id}
        if entry not in self._floor_settings_to_reset:
            self._floor_settings_to_reset.append(entry)

    def cleanup(self) -> None:
        """Delete every registered resource, logging instead of raising."""
        for name in list(self._templates_to_cleanup):
            self._quietly(
                "Model Armor template",
                name,
                lambda: self.templates.delete_template(name),
            )
        self._templates_to_cleanup.clear()

        inspect_template = self._created_inspect_template
        if inspect_template:
            self._quietly(
                "DLP inspect template",
                inspect_template,
                lambda: self.dlp.delete_inspect_template(inspect_template),
            )
            self._created_inspect_template = None

        deidentify_template = self._created_deidentify_template
        if deidentify_template:
            self._quietly(
                "DLP deidentify template",
                deidentify_template,
                lambda: self.dlp.delete_deidentify_template(deidentify_template),
            )
            self._created_deidentify_template = None

        for entry in self._floor_settings_to_reset:
            scope, resource_id = entry["scope"], entry["resource_id"]
            self._quietly(
                "floor setting",
                f"{scope}/{resource_id or self.settings.project}",
                lambda: self.floor_settings.reset_floor_setting(scope, resource_id),
            )
        self._floor_settings_to_reset.clear()

    def _quietly(self, kind: str, name: str, action: Callable[[], Any]) -> None:
        # `action` resolves the lazy managers, so it must run inside the try.
        if self.settle_seconds:
            time.sleep(self.settle_seconds)
        try:
            action()
        except NotFound:
            logger.info("%s %s was already gone", kind.capitalize(), name)
        except Exception as e:
            logger.warning("Failed to clean up %s %s: %s", kind, name, e)

    def __enter__(self) -> "ModelArmorTestResources":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.cleanup()
