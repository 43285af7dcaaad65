"""
Sample to change the RAI filter thresholds of an existing template.
"""

from google.cloud import modelarmor_v1

from langchain_google_model_armor import (
    FilterSettings,
    ModelArmorTemplateManager,
    RaiFilter,
)


def update_model_armor_template(
    project_id: str = "my-project",
    location_id: str = "us-central1",
    template_id: str = "my-template",
) -> modelarmor_v1.Template:
    manager = ModelArmorTemplateManager(project=project_id, location=location_id)

    # Only the filter configuration is replaced; labels and metadata stay.
    template = manager.update_template_filters(
        template_id,
        FilterSettings(
            rai_filters=[
                RaiFilter(filter_type="DANGEROUS", confidence_level="LOW_AND_ABOVE"),
                RaiFilter(filter_type="HARASSMENT", confidence_level="HIGH"),
                RaiFilter(
                    filter_type="SEXUALLY_EXPLICIT",
                    confidence_level="MEDIUM_AND_ABOVE",
                ),
            ]
        ),
    )
    print(f"Updated template: {template.name}")
    return template


if __name__ == "__main__":
    update_model_armor_template()
