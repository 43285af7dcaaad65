"""
Sample to turn on operation logging for an existing template.
"""

from google.cloud import modelarmor_v1

from langchain_google_model_armor import ModelArmorTemplateManager, TemplateMetadata


def update_model_armor_template_metadata(
    project_id: str = "my-project",
    location_id: str = "us-central1",
    template_id: str = "my-template",
) -> modelarmor_v1.Template:
    manager = ModelArmorTemplateManager(project=project_id, location=location_id)

    template = manager.update_template_metadata(
        template_id,
        TemplateMetadata(log_template_operations=True, log_sanitize_operations=True),
    )
    print(f"Updated template metadata: {template.name}")
    return template


if __name__ == "__main__":
    update_model_armor_template_metadata()
