"""
Sample to screen a user prompt with a Model Armor template.
"""

from google.cloud import modelarmor_v1

from langchain_google_model_armor import ModelArmorSanitizer


def sanitize_user_prompt(
    project_id: str = "my-project",
    location_id: str = "us-central1",
    template_id: str = "my-template",
    user_prompt: str = "Unsafe user prompt",
) -> modelarmor_v1.SanitizationResult:
    sanitizer = ModelArmorSanitizer(
        project=project_id, location=location_id, template_id=template_id
    )

    result = sanitizer.sanitize_user_prompt(user_prompt)
    print(result)
    return result


if __name__ == "__main__":
    sanitize_user_prompt()
