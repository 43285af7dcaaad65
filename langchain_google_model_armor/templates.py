"""
Create and manage Model Armor templates.

Ref: https://cloud.google.com/security-command-center/docs/manage-model-armor-templates
"""

import logging
from typing import Iterable, Mapping, Optional, Sequence, Union, cast

from google.cloud import modelarmor_v1
from google.protobuf import field_mask_pb2

from langchain_google_model_armor._utils import resolve_resource_name
from langchain_google_model_armor.config import ModelArmorParams
from langchain_google_model_armor.filters import (
    FilterSettings,
    TemplateMetadata,
    TemplateSpec,
)

logger = logging.getLogger(__name__)

TemplateLike = Union[TemplateSpec, modelarmor_v1.Template]


class ModelArmorTemplateManager(ModelArmorParams):
    """
    Template CRUD for one project and location.

    Every method is a single blocking call to the Model Armor API. Service
    errors (`NotFound`, `AlreadyExists`, `PermissionDenied`, ...) are raised
    as `google.api_core.exceptions` and never caught here.

    Example:
        ```python
        from langchain_google_model_armor import (
            FilterSettings,
            ModelArmorTemplateManager,
            RaiFilter,
            TemplateSpec,
        )

        manager = ModelArmorTemplateManager(project="my-project")
        manager.create_template(
            TemplateSpec(
                filters=FilterSettings(
                    rai_filters=[RaiFilter(filter_type="DANGEROUS")],
                )
            ),
            template_id="my-template",
        )
        ```
    """

    def template_path(self, template_id: str) -> str:
        """Full resource name of `template_id` in this project and location."""
        return resolve_resource_name(template_id, self.parent, "templates")

    @property
    def _client(self) -> modelarmor_v1.ModelArmorClient:
        return cast(modelarmor_v1.ModelArmorClient, self.client)

    def create_template(
        self, template: TemplateLike, template_id: str
    ) -> modelarmor_v1.Template:
        """Create a template.

        Args:
            template: The template definition.
            template_id: ID of the new template, unique within the location.

        Returns:
            The created template as stored by the service.
        """
        if not template_id:
            raise ValueError("template_id is required to create a template.")
        if isinstance(template, TemplateSpec):
            template = template.to_proto()

        request = modelarmor_v1.CreateTemplateRequest(
            parent=self.parent,
            template_id=template_id,
            template=template,
        )
        response = self._client.create_template(request=request)
        logger.info("Created Model Armor template %s", response.name)
        return response

    def get_template(self, template: str) -> modelarmor_v1.Template:
        """Fetch a template by ID or full resource name."""
        request = modelarmor_v1.GetTemplateRequest(name=self.template_path(template))
        return self._client.get_template(request=request)

    def list_templates(
        self,
        filter: Optional[str] = None,
        page_size: Optional[int] = None,
        order_by: Optional[str] = None,
    ) -> Iterable[modelarmor_v1.Template]:
        """List the templates in this location.

        The returned pager fetches further pages as it is iterated. Call the
        method again to start over from the first page.

        Args:
            filter: Optional filter expression, e.g. `labels.env="prod"`.
            page_size: Optional page size hint.
            order_by: Optional ordering expression.
        """
        request = modelarmor_v1.ListTemplatesRequest(parent=self.parent)
        if filter:
            request.filter = filter
        if page_size:
            request.page_size = page_size
        if order_by:
            request.order_by = order_by
        return self._client.list_templates(request=request)

    def update_template(
        self,
        template: TemplateLike,
        update_mask: Optional[Sequence[str]] = None,
        template_id: Optional[str] = None,
    ) -> modelarmor_v1.Template:
        """Update an existing template.

        Args:
            template: The new template contents. A `TemplateSpec` needs
                `template_id`; a `Template` message may carry its own name.
            update_mask: Field paths to change, e.g. `["labels"]`. When
                omitted the service replaces every updatable field.
            template_id: ID or full name of the template to update.

        Returns:
            The updated template.
        """
        if isinstance(template, TemplateSpec):
            if not template_id:
                raise ValueError("template_id is required to update a TemplateSpec.")
            template = template.to_proto(name=self.template_path(template_id))
        elif template_id:
            template = modelarmor_v1.Template(
                template, name=self.template_path(template_id)
            )
        elif not template.name:
            raise ValueError("The template to update has no resource name.")

        request = modelarmor_v1.UpdateTemplateRequest(template=template)
        if update_mask:
            request.update_mask = field_mask_pb2.FieldMask(paths=list(update_mask))

        response = self._client.update_template(request=request)
        logger.info(
            "Updated Model Armor template %s (fields: %s)",
            response.name,
            ", ".join(update_mask) if update_mask else "all",
        )
        return response

    def update_template_filters(
        self, template_id: str, filters: FilterSettings
    ) -> modelarmor_v1.Template:
        """Replace the filter configuration of a template."""
        template = modelarmor_v1.Template(
            name=self.template_path(template_id),
            filter_config=filters.to_proto(),
        )
        return self.update_template(template, update_mask=["filter_config"])

    def update_template_labels(
        self, template_id: str, labels: Mapping[str, str]
    ) -> modelarmor_v1.Template:
        """Replace the labels of a template, leaving its filters untouched."""
        template = modelarmor_v1.Template(
            name=self.template_path(template_id),
            labels=dict(labels),
        )
        return self.update_template(template, update_mask=["labels"])

    def update_template_metadata(
        self, template_id: str, metadata: TemplateMetadata
    ) -> modelarmor_v1.Template:
        """Replace the metadata flags of a template."""
        template = modelarmor_v1.Template(
            name=self.template_path(template_id),
            template_metadata=metadata.to_proto(),
        )
        return self.update_template(template, update_mask=["template_metadata"])

    def delete_template(self, template: str) -> None:
        """Delete a template by ID or full resource name.

        Deleting twice raises `NotFound`.
        """
        name = self.template_path(template)
        self._client.delete_template(
            request=modelarmor_v1.DeleteTemplateRequest(name=name)
        )
        logger.info("Deleted Model Armor template %s", name)
