"""
Samples to screen a prompt and its response with one template.
"""

from langchain_google_model_armor import ModelArmorSanitizer, PromptAndResponseResult


def sanitize_prompt_and_response(
    project_id: str = "my-project",
    location_id: str = "us-central1",
    template_id: str = "my-template",
    user_prompt: str = "Unsafe user prompt",
    model_response: str = "Unsanitized model output",
) -> PromptAndResponseResult:
    sanitizer = ModelArmorSanitizer(
        project=project_id, location=location_id, template_id=template_id
    )

    result = sanitizer.sanitize_prompt_and_response(user_prompt, model_response)
    print(
        "User prompt sanitization result: "
        f"{'Safe' if result.is_prompt_safe else 'Unsafe'}"
    )
    print(
        "Model response sanitization result: "
        f"{'Safe' if result.is_response_safe else 'Unsafe'}"
    )
    return result


def sanitize_prompt_and_response_with_sdp(
    project_id: str = "my-project",
    location_id: str = "us-central1",
    template_id: str = "my-template",
    user_prompt: str = "My email is user@example.com and my phone is 555-123-4567",
    model_response: str = "I found your ITIN: 988-86-1234 in our records",
) -> PromptAndResponseResult:
    """Use a template with advanced SDP to get deidentified text back."""
    sanitizer = ModelArmorSanitizer(
        project=project_id, location=location_id, template_id=template_id
    )

    result = sanitizer.sanitize_prompt_and_response(user_prompt, model_response)
    print(f"Original user prompt: {user_prompt}")
    print(f"Deidentified user prompt: {result.deidentified_prompt}")
    print(f"Original model response: {model_response}")
    print(f"Deidentified model response: {result.deidentified_response}")
    return result


if __name__ == "__main__":
    sanitize_prompt_and_response()
