"""
Sensitive Data Protection (DLP) templates used by advanced SDP filters.

An advanced SDP Model Armor template points at a DLP inspect template (what
to look for) and optionally a DLP deidentify template (how to redact it).
Both must live in the same project and location as the Model Armor template.
"""

import logging
from typing import Any, List, Optional, Sequence, cast

from google.cloud import dlp_v2

from langchain_google_model_armor import _client_utils
from langchain_google_model_armor._utils import resolve_resource_name
from langchain_google_model_armor.config import ModelArmorParams

logger = logging.getLogger(__name__)

DEFAULT_INFO_TYPES = (
    "EMAIL_ADDRESS",
    "PHONE_NUMBER",
    "US_INDIVIDUAL_TAXPAYER_IDENTIFICATION_NUMBER",
)
DEFAULT_REPLACEMENT = "[REDACTED]"


def _info_types(names: Sequence[str]) -> List[dlp_v2.InfoType]:
    return [dlp_v2.InfoType(name=name) for name in names]


class DlpTemplateManager(ModelArmorParams):
    """Create and delete the DLP templates referenced by Model Armor."""

    def _create_client(self) -> Any:
        return _client_utils._get_dlp_client(
            location=self.location,
            credentials=self.credentials,
            transport=self.transport,
            client_options=self.client_options,
            client_info=self.client_info,
        )

    @property
    def _client(self) -> dlp_v2.DlpServiceClient:
        return cast(dlp_v2.DlpServiceClient, self.client)

    def inspect_template_path(self, template_id: str) -> str:
        return resolve_resource_name(template_id, self.parent, "inspectTemplates")

    def deidentify_template_path(self, template_id: str) -> str:
        return resolve_resource_name(template_id, self.parent, "deidentifyTemplates")

    def create_inspect_template(
        self,
        template_id: str,
        info_types: Sequence[str] = DEFAULT_INFO_TYPES,
        display_name: Optional[str] = None,
    ) -> dlp_v2.InspectTemplate:
        """Create an inspect template detecting `info_types`."""
        inspect_template = dlp_v2.InspectTemplate(
            display_name=display_name or template_id,
            inspect_config=dlp_v2.InspectConfig(info_types=_info_types(info_types)),
        )
        response = self._client.create_inspect_template(
            request=dlp_v2.CreateInspectTemplateRequest(
                parent=self.parent,
                inspect_template=inspect_template,
                template_id=template_id,
            )
        )
        logger.info("Created DLP inspect template %s", response.name)
        return response

    def create_deidentify_template(
        self,
        template_id: str,
        info_types: Sequence[str] = DEFAULT_INFO_TYPES,
        replacement: str = DEFAULT_REPLACEMENT,
        display_name: Optional[str] = None,
    ) -> dlp_v2.DeidentifyTemplate:
        """Create a deidentify template replacing `info_types` with `replacement`."""
        transformation = dlp_v2.InfoTypeTransformations.InfoTypeTransformation(
            info_types=_info_types(info_types),
            primitive_transformation=dlp_v2.PrimitiveTransformation(
                replace_config=dlp_v2.ReplaceValueConfig(
                    new_value=dlp_v2.Value(string_value=replacement)
                )
            ),
        )
        deidentify_template = dlp_v2.DeidentifyTemplate(
            display_name=display_name or template_id,
            deidentify_config=dlp_v2.DeidentifyConfig(
                info_type_transformations=dlp_v2.InfoTypeTransformations(
                    transformations=[transformation]
                )
            ),
        )
        response = self._client.create_deidentify_template(
            request=dlp_v2.CreateDeidentifyTemplateRequest(
                parent=self.parent,
                deidentify_template=deidentify_template,
                template_id=template_id,
            )
        )
        logger.info("Created DLP deidentify template %s", response.name)
        return response

    def delete_inspect_template(self, template_id: str) -> None:
        name = self.inspect_template_path(template_id)
        self._client.delete_inspect_template(
            request=dlp_v2.DeleteInspectTemplateRequest(name=name)
        )
        logger.info("Deleted DLP inspect template %s", name)

    def delete_deidentify_template(self, template_id: str) -> None:
        name = self.deidentify_template_path(template_id)
        self._client.delete_deidentify_template(
            request=dlp_v2.DeleteDeidentifyTemplateRequest(name=name)
        )
        logger.info("Deleted DLP deidentify template %s", name)
