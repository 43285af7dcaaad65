"""
Screen user prompts and model responses with a Model Armor template.

Ref: https://cloud.google.com/security-command-center/docs/sanitize-prompts-responses
"""

import logging
from typing import Optional, cast

from google.cloud.modelarmor_v1 import (
    DataItem,
    ModelArmorClient,
    SanitizationResult,
    SanitizeModelResponseRequest,
    SanitizeUserPromptRequest,
)
from pydantic import BaseModel, Field

from langchain_google_model_armor import results
from langchain_google_model_armor._utils import resolve_resource_name
from langchain_google_model_armor.config import ModelArmorParams

logger = logging.getLogger(__name__)


class PromptAndResponseResult(BaseModel):
    """Outcome of sanitizing a prompt and the response generated for it."""

    model_config = {"arbitrary_types_allowed": True}

    prompt_result: SanitizationResult
    response_result: SanitizationResult
    is_prompt_safe: bool
    is_response_safe: bool
    deidentified_prompt: str
    deidentified_response: str


class ModelArmorSanitizer(ModelArmorParams):
    """
    Template-scoped sanitization client.

    Both calls are blocking and return the service's `SanitizationResult`
    as is. A result without matches is a normal outcome, not an error;
    referencing a missing template raises `NotFound`.

    Attributes:
        template_id: Default template ID or full resource name. Each call
            may override it.
    """

    template_id: Optional[str] = Field(
        default=None, description="Model Armor template ID for sanitization."
    )

    def template_path(self, template_id: Optional[str] = None) -> str:
        template = template_id or self.template_id
        if not template:
            raise ValueError("A Model Armor template ID is required.")
        return resolve_resource_name(template, self.parent, "templates")

    def sanitize_user_prompt(
        self, text: str, template_id: Optional[str] = None
    ) -> SanitizationResult:
        """Screen a user prompt.

        Args:
            text: The prompt text.
            template_id: Template to apply instead of `self.template_id`.
        """
        name = self.template_path(template_id)
        logger.info("Starting prompt sanitization request with template %s", name)
        response = cast(ModelArmorClient, self.client).sanitize_user_prompt(
            request=SanitizeUserPromptRequest(
                name=name,
                user_prompt_data=DataItem(text=text),
            )
        )
        return response.sanitization_result

    def sanitize_model_response(
        self,
        text: str,
        template_id: Optional[str] = None,
        user_prompt: Optional[str] = None,
    ) -> SanitizationResult:
        """Screen a model response.

        Args:
            text: The model response text.
            template_id: Template to apply instead of `self.template_id`.
            user_prompt: The prompt that produced the response, sent as context.
        """
        name = self.template_path(template_id)
        logger.info(
            "Starting model response sanitization request with template %s", name
        )
        request = SanitizeModelResponseRequest(
            name=name,
            model_response_data=DataItem(text=text),
        )
        if user_prompt:
            request.user_prompt = user_prompt
        response = cast(ModelArmorClient, self.client).sanitize_model_response(
            request=request
        )
        return response.sanitization_result

    def sanitize_prompt_and_response(
        self,
        prompt: str,
        response: str,
        template_id: Optional[str] = None,
    ) -> PromptAndResponseResult:
        """Screen a prompt and a response with the same template.

        When the template carries an advanced SDP configuration with a
        deidentify template, the deidentified texts are reported; otherwise
        the originals are.
        """
        prompt_result = self.sanitize_user_prompt(prompt, template_id=template_id)
        response_result = self.sanitize_model_response(
            response, template_id=template_id
        )

        outcome = PromptAndResponseResult(
            prompt_result=prompt_result,
            response_result=response_result,
            is_prompt_safe=results.is_clean(prompt_result),
            is_response_safe=results.is_clean(response_result),
            deidentified_prompt=cast(
                str, results.get_deidentified_text(prompt_result, default=prompt)
            ),
            deidentified_response=cast(
                str, results.get_deidentified_text(response_result, default=response)
            ),
        )
        logger.info(
            "Prompt sanitization result: %s, response sanitization result: %s",
            "Safe" if outcome.is_prompt_safe else "Unsafe",
            "Safe" if outcome.is_response_safe else "Unsafe",
        )
        return outcome
