"""
Samples to list Model Armor templates, optionally filtered.
"""

from typing import List

from google.cloud import modelarmor_v1

from langchain_google_model_armor import ModelArmorTemplateManager


def list_model_armor_templates(
    project_id: str = "my-project",
    location_id: str = "us-central1",
) -> List[modelarmor_v1.Template]:
    manager = ModelArmorTemplateManager(project=project_id, location=location_id)

    templates = list(manager.list_templates())
    for template in templates:
        print(f"Template: {template.name}")
    return templates


def list_model_armor_templates_with_filter(
    project_id: str = "my-project",
    location_id: str = "us-central1",
    template_id: str = "my-template",
) -> List[modelarmor_v1.Template]:
    manager = ModelArmorTemplateManager(project=project_id, location=location_id)

    # Filter syntax: https://google.aip.dev/160
    templates = list(
        manager.list_templates(filter=f'name="{manager.template_path(template_id)}"')
    )
    print(f"Templates found: {[template.name for template in templates]}")
    return templates


if __name__ == "__main__":
    list_model_armor_templates()
