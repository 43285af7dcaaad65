"""
Sample to replace the labels of an existing template.
"""

from typing import Dict, Optional

from google.cloud import modelarmor_v1

from langchain_google_model_armor import ModelArmorTemplateManager


def update_model_armor_template_labels(
    project_id: str = "my-project",
    location_id: str = "us-central1",
    template_id: str = "my-template",
    labels: Optional[Dict[str, str]] = None,
) -> modelarmor_v1.Template:
    manager = ModelArmorTemplateManager(project=project_id, location=location_id)

    # The `labels` field mask leaves the filter configuration untouched.
    # Ref: https://protobuf.dev/reference/protobuf/google.protobuf/#field-mask
    template = manager.update_template_labels(
        template_id, labels or {"key1": "updatedvalue1", "key2": "updatedvalue2"}
    )
    print(f"Updated template labels: {template.name}")
    return template


if __name__ == "__main__":
    update_model_armor_template_labels()
