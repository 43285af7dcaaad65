"""
Sample to create a template that logs template and sanitize operations.
"""

from google.cloud import modelarmor_v1

from langchain_google_model_armor import (
    FilterSettings,
    ModelArmorTemplateManager,
    RaiFilter,
    TemplateMetadata,
    TemplateSpec,
)


def create_model_armor_template_with_metadata(
    project_id: str = "my-project",
    location_id: str = "us-central1",
    template_id: str = "my-template",
) -> modelarmor_v1.Template:
    manager = ModelArmorTemplateManager(project=project_id, location=location_id)

    template = manager.create_template(
        TemplateSpec(
            filters=FilterSettings(
                rai_filters=[
                    RaiFilter(filter_type="DANGEROUS", confidence_level="HIGH"),
                    RaiFilter(
                        filter_type="HATE_SPEECH", confidence_level="MEDIUM_AND_ABOVE"
                    ),
                ]
            ),
            metadata=TemplateMetadata(
                log_template_operations=True,
                log_sanitize_operations=True,
            ),
        ),
        template_id=template_id,
    )
    print(f"Created template with metadata: {template.name}")
    return template


if __name__ == "__main__":
    create_model_armor_template_with_metadata()
