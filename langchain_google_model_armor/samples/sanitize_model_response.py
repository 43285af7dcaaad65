"""
Sample to screen a model response, optionally with the prompt that produced it.
"""

from typing import Optional

from google.cloud import modelarmor_v1

from langchain_google_model_armor import ModelArmorSanitizer


def sanitize_model_response(
    project_id: str = "my-project",
    location_id: str = "us-central1",
    template_id: str = "my-template",
    model_response: str = "Unsanitized model output",
    user_prompt: Optional[str] = None,
) -> modelarmor_v1.SanitizationResult:
    sanitizer = ModelArmorSanitizer(
        project=project_id, location=location_id, template_id=template_id
    )

    result = sanitizer.sanitize_model_response(
        model_response, user_prompt=user_prompt
    )
    print(result)
    return result


if __name__ == "__main__":
    sanitize_model_response()
