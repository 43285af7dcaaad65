"""
Sample to delete a Model Armor template.
"""

from langchain_google_model_armor import ModelArmorTemplateManager


def delete_model_armor_template(
    project_id: str = "my-project",
    location_id: str = "us-central1",
    template_id: str = "my-template",
) -> None:
    manager = ModelArmorTemplateManager(project=project_id, location=location_id)

    manager.delete_template(template_id)
    print(f"Deleted template: {manager.template_path(template_id)}")


if __name__ == "__main__":
    delete_model_armor_template()
