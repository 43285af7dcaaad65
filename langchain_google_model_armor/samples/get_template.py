"""
Sample to fetch a Model Armor template.
"""

from google.cloud import modelarmor_v1

from langchain_google_model_armor import ModelArmorTemplateManager


def get_model_armor_template(
    project_id: str = "my-project",
    location_id: str = "us-central1",
    template_id: str = "my-template",
) -> modelarmor_v1.Template:
    manager = ModelArmorTemplateManager(project=project_id, location=location_id)

    template = manager.get_template(template_id)
    print(f"Retrieved template: {template.name}")
    return template


if __name__ == "__main__":
    get_model_armor_template()
