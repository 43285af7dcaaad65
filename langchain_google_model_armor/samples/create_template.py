"""
Sample to create a Model Armor template with RAI filters.
"""

from google.cloud import modelarmor_v1

from langchain_google_model_armor import (
    FilterSettings,
    ModelArmorTemplateManager,
    RaiFilter,
    TemplateSpec,
)


def create_model_armor_template(
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
                    RaiFilter(
                        filter_type="SEXUALLY_EXPLICIT",
                        confidence_level="MEDIUM_AND_ABOVE",
                    ),
                    RaiFilter(
                        filter_type="HARASSMENT", confidence_level="MEDIUM_AND_ABOVE"
                    ),
                ]
            )
        ),
        template_id=template_id,
    )
    print(f"Created template: {template.name}")
    return template


if __name__ == "__main__":
    create_model_armor_template()
