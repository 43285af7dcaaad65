"""
Sample to create a template carrying labels.
"""

from typing import Dict, Optional

from google.cloud import modelarmor_v1

from langchain_google_model_armor import (
    FilterSettings,
    ModelArmorTemplateManager,
    RaiFilter,
    TemplateSpec,
)


def create_model_armor_template_with_labels(
    project_id: str = "my-project",
    location_id: str = "us-central1",
    template_id: str = "my-template",
    labels: Optional[Dict[str, str]] = None,
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
            ),
            labels=labels or {"key1": "value1", "key2": "value2"},
        ),
        template_id=template_id,
    )
    print(f"Created template with labels: {template.name}")
    return template


if __name__ == "__main__":
    create_model_armor_template_with_labels()
