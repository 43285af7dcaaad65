"""Integration tests for prompt and response sanitization."""

import os

import pytest
from google.api_core.exceptions import NotFound
from google.cloud.modelarmor_v1 import FilterMatchState
from langchain_core.runnables import RunnableLambda, RunnableSequence

from langchain_google_model_armor import (
    ModelArmorSanitizePromptRunnable,
    ModelArmorSanitizer,
    ModelArmorSanitizeResponseRunnable,
    results,
)
from langchain_google_model_armor.fixtures import ModelArmorTestResources

pytestmark = [
    pytest.mark.extended,
    pytest.mark.skipif(
        not os.environ.get("GOOGLE_CLOUD_PROJECT"),
        reason="GOOGLE_CLOUD_PROJECT env var not set. Skipping integration test.",
    ),
]

SAFE_PROMPT = "How to make cheesecake without oven at home?"
MALICIOUS_URL = "https://testsafebrowsing.appspot.com/s/malware.html"
MALICIOUS_URI_PROMPT = f"Can you describe this link? {MALICIOUS_URL}"


@pytest.fixture(scope="module")
def base_template(resources: ModelArmorTestResources) -> str:
    return resources.create_base_template().name


@pytest.fixture(scope="module")
def malicious_uri_template(resources: ModelArmorTestResources) -> str:
    return resources.create_malicious_uri_template().name


@pytest.fixture(scope="module")
def advanced_sdp_template(resources: ModelArmorTestResources) -> str:
    return resources.create_advanced_sdp_template().name


@pytest.fixture()
def missing_template(resources: ModelArmorTestResources) -> str:
    return resources.templates.template_path(resources.new_template_id("missing"))


def test_safe_prompt_has_no_match(
    sanitizer: ModelArmorSanitizer, base_template: str
) -> None:
    result = sanitizer.sanitize_user_prompt(SAFE_PROMPT, template_id=base_template)

    assert result.filter_match_state == FilterMatchState.NO_MATCH_FOUND
    assert results.is_safe(result)


def test_safe_response_has_no_match(
    sanitizer: ModelArmorSanitizer, base_template: str
) -> None:
    result = sanitizer.sanitize_model_response(
        "To make cheesecake without oven, you'll need to follow these steps....",
        template_id=base_template,
        user_prompt=SAFE_PROMPT,
    )

    assert result.filter_match_state == FilterMatchState.NO_MATCH_FOUND


def test_malicious_uri_is_located(
    sanitizer: ModelArmorSanitizer, malicious_uri_template: str
) -> None:
    result = sanitizer.sanitize_user_prompt(
        MALICIOUS_URI_PROMPT, template_id=malicious_uri_template
    )

    assert result.filter_match_state == FilterMatchState.MATCH_FOUND
    matches = results.get_malicious_uri_matches(result)
    assert [(m.uri, m.start, m.end) for m in matches] == [(MALICIOUS_URL, 28, 79)]
    assert MALICIOUS_URI_PROMPT[matches[0].start : matches[0].end] == MALICIOUS_URL


def test_sdp_deidentifies_response(
    sanitizer: ModelArmorSanitizer, advanced_sdp_template: str
) -> None:
    outcome = sanitizer.sanitize_prompt_and_response(
        SAFE_PROMPT,
        "I found your ITIN: 988-86-1234 in our records",
        template_id=advanced_sdp_template,
    )

    assert outcome.is_prompt_safe
    assert not outcome.is_response_safe
    assert "988-86-1234" not in outcome.deidentified_response
    assert "[REDACTED]" in outcome.deidentified_response


def test_missing_template_raises_not_found(
    sanitizer: ModelArmorSanitizer, missing_template: str
) -> None:
    with pytest.raises(NotFound):
        sanitizer.sanitize_user_prompt(SAFE_PROMPT, template_id=missing_template)


def test_pipeline_integration(
    resources: ModelArmorTestResources, base_template: str
) -> None:
    """Test invocation of a chain with both the Model Armor runnables."""
    settings = resources.settings
    prompt_sanitizer = ModelArmorSanitizePromptRunnable(
        project=settings.project,
        location=settings.location,
        template_id=base_template,
    )
    response_sanitizer = ModelArmorSanitizeResponseRunnable(
        project=settings.project,
        location=settings.location,
        template_id=base_template,
    )
    llm = RunnableLambda(lambda x, **kwargs: f"Echo: {x}")
    chain: RunnableSequence = RunnableSequence(
        prompt_sanitizer, llm, response_sanitizer
    )

    assert chain.invoke(SAFE_PROMPT) == f"Echo: {SAFE_PROMPT}"


def test_runnable_blocks_malicious_uri(
    resources: ModelArmorTestResources, malicious_uri_template: str
) -> None:
    runnable = ModelArmorSanitizePromptRunnable(
        project=resources.settings.project,
        location=resources.settings.location,
        template_id=malicious_uri_template,
    )

    with pytest.raises(ValueError, match="flagged as unsafe"):
        runnable.invoke(MALICIOUS_URI_PROMPT)
    assert runnable.invoke(MALICIOUS_URI_PROMPT, fail_open=True) == (
        MALICIOUS_URI_PROMPT
    )
