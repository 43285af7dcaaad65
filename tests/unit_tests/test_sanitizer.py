from unittest.mock import MagicMock

import pytest
from google.api_core.exceptions import NotFound
from google.cloud import modelarmor_v1
from google.cloud.modelarmor_v1 import FilterMatchState

from langchain_google_model_armor.sanitizer import ModelArmorSanitizer

TEMPLATE_NAME = "projects/test-project/locations/us-central1/templates/test-template"


def _result(match_found: bool) -> modelarmor_v1.SanitizationResult:
    return modelarmor_v1.SanitizationResult(
        filter_match_state=(
            FilterMatchState.MATCH_FOUND
            if match_found
            else FilterMatchState.NO_MATCH_FOUND
        ),
        invocation_result=modelarmor_v1.InvocationResult.SUCCESS,
    )


def _deidentified(text: str) -> modelarmor_v1.SanitizationResult:
    result = _result(match_found=True)
    result.filter_results["sdp"] = modelarmor_v1.FilterResult(
        sdp_filter_result=modelarmor_v1.SdpFilterResult(
            deidentify_result=modelarmor_v1.SdpDeidentifyResult(
                match_state=FilterMatchState.MATCH_FOUND,
                data=modelarmor_v1.DataItem(text=text),
            )
        )
    )
    return result


@pytest.fixture
def mock_client() -> MagicMock:
    return MagicMock()


@pytest.fixture
def sanitizer(mock_client: MagicMock) -> ModelArmorSanitizer:
    return ModelArmorSanitizer(
        project="test-project",
        location="us-central1",
        template_id="test-template",
        client=mock_client,
    )


def test_sanitize_user_prompt(
    sanitizer: ModelArmorSanitizer, mock_client: MagicMock
) -> None:
    mock_client.sanitize_user_prompt.return_value = (
        modelarmor_v1.SanitizeUserPromptResponse(
            sanitization_result=_result(match_found=False)
        )
    )

    result = sanitizer.sanitize_user_prompt(
        "How to make cheesecake without oven at home?"
    )

    request = mock_client.sanitize_user_prompt.call_args.kwargs["request"]
    assert request.name == TEMPLATE_NAME
    assert (
        request.user_prompt_data.text
        == "How to make cheesecake without oven at home?"
    )
    assert result.filter_match_state == FilterMatchState.NO_MATCH_FOUND


def test_sanitize_model_response_with_prompt_context(
    sanitizer: ModelArmorSanitizer, mock_client: MagicMock
) -> None:
    mock_client.sanitize_model_response.return_value = (
        modelarmor_v1.SanitizeModelResponseResponse(
            sanitization_result=_result(match_found=True)
        )
    )

    result = sanitizer.sanitize_model_response(
        "model output", template_id="other-template", user_prompt="user input"
    )

    request = mock_client.sanitize_model_response.call_args.kwargs["request"]
    assert request.name.endswith("/templates/other-template")
    assert request.model_response_data.text == "model output"
    assert request.user_prompt == "user input"
    assert result.filter_match_state == FilterMatchState.MATCH_FOUND


def test_template_is_required(mock_client: MagicMock) -> None:
    sanitizer = ModelArmorSanitizer(project="test-project", client=mock_client)

    with pytest.raises(ValueError, match="template ID is required"):
        sanitizer.sanitize_user_prompt("text")
    mock_client.sanitize_user_prompt.assert_not_called()


def test_missing_template_propagates_not_found(
    sanitizer: ModelArmorSanitizer, mock_client: MagicMock
) -> None:
    mock_client.sanitize_user_prompt.side_effect = NotFound("template not found")

    with pytest.raises(NotFound):
        sanitizer.sanitize_user_prompt("text")


def test_sanitize_prompt_and_response(
    sanitizer: ModelArmorSanitizer, mock_client: MagicMock
) -> None:
    mock_client.sanitize_user_prompt.return_value = (
        modelarmor_v1.SanitizeUserPromptResponse(
            sanitization_result=_result(match_found=False)
        )
    )
    mock_client.sanitize_model_response.return_value = (
        modelarmor_v1.SanitizeModelResponseResponse(
            sanitization_result=_result(match_found=True)
        )
    )

    outcome = sanitizer.sanitize_prompt_and_response("prompt", "response")

    assert outcome.is_prompt_safe
    assert not outcome.is_response_safe
    assert outcome.deidentified_prompt == "prompt"
    assert outcome.deidentified_response == "response"
    assert mock_client.sanitize_user_prompt.call_count == 1
    assert mock_client.sanitize_model_response.call_count == 1


def test_sanitize_prompt_and_response_with_sdp(
    sanitizer: ModelArmorSanitizer, mock_client: MagicMock
) -> None:
    mock_client.sanitize_user_prompt.return_value = (
        modelarmor_v1.SanitizeUserPromptResponse(
            sanitization_result=_deidentified("My email is [REDACTED]")
        )
    )
    mock_client.sanitize_model_response.return_value = (
        modelarmor_v1.SanitizeModelResponseResponse(
            sanitization_result=_deidentified("I found your ITIN: [REDACTED]")
        )
    )

    outcome = sanitizer.sanitize_prompt_and_response(
        "My email is user@example.com",
        "I found your ITIN: 988-86-1234 in our records",
    )

    assert outcome.deidentified_prompt == "My email is [REDACTED]"
    assert "988-86-1234" not in outcome.deidentified_response
    assert "[REDACTED]" in outcome.deidentified_response


def test_failed_invocation_is_not_reported_safe(
    sanitizer: ModelArmorSanitizer, mock_client: MagicMock
) -> None:
    failed = modelarmor_v1.SanitizationResult(
        invocation_result=modelarmor_v1.InvocationResult.FAILURE
    )
    mock_client.sanitize_user_prompt.return_value = (
        modelarmor_v1.SanitizeUserPromptResponse(sanitization_result=failed)
    )
    mock_client.sanitize_model_response.return_value = (
        modelarmor_v1.SanitizeModelResponseResponse(sanitization_result=failed)
    )

    outcome = sanitizer.sanitize_prompt_and_response("prompt", "response")

    assert (
        outcome.prompt_result.filter_match_state
        == FilterMatchState.FILTER_MATCH_STATE_UNSPECIFIED
    )
    assert not outcome.is_prompt_safe
    assert not outcome.is_response_safe
