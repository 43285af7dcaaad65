"""
LangChain Runnables that screen user prompts and model responses with Model
Armor before passing them on unchanged.

Prerequisites
-------------

- Enable the Model Armor API in your GCP project.
    - See: https://cloud.google.com/security-command-center/docs/get-started-model-armor
- Grant the `modelarmor.user` IAM role to the principal running the chain.
- Create a Model Armor template (see `ModelArmorTemplateManager`) and pass
    its ID as `template_id`.
"""

import logging
from collections.abc import Mapping
from typing import Any, List, Optional, TypeVar, Union

from google.cloud.modelarmor_v1 import SanitizationResult
from langchain_core.callbacks.manager import dispatch_custom_event
from langchain_core.messages import BaseMessage
from langchain_core.prompts import BasePromptTemplate
from langchain_core.runnables import RunnableSerializable
from langchain_core.runnables.config import RunnableConfig
from pydantic import Field

from langchain_google_model_armor import results
from langchain_google_model_armor.sanitizer import ModelArmorSanitizer

T = TypeVar("T")

FINDING_EVENT = "on_model_armor_finding"

logger = logging.getLogger(__name__)


def _text_from_content(content: Any) -> str:
    # Message content is a string or a list of str / {"type": "text", ...} blocks.
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, Mapping) and block.get("type") == "text":
                parts.append(str(block.get("text", "")))
        return "\n".join(part for part in parts if part)
    return str(content)


class ModelArmorSanitizeBaseRunnable(ModelArmorSanitizer, RunnableSerializable):
    """
    Base runnable for user prompt or model response sanitization.

    Attributes:
        fail_open: If `True`, unsafe content is logged and passed through;
            otherwise a `ValueError` is raised.
    """

    fail_open: bool = Field(
        default=False,
        description="If True, allows unsafe prompts/responses to pass through, "
        "otherwise, raises an error.",
    )

    @classmethod
    def is_lc_serializable(cls) -> bool:
        return True

    @classmethod
    def get_lc_namespace(cls) -> list[str]:
        return ["langchain_google_model_armor", "runnable"]

    def _extract_input(
        self,
        value: Union[str, BaseMessage, BasePromptTemplate, List[BaseMessage], object],
    ) -> str:
        """Convert LangChain inputs into the text Model Armor screens.

        Raises:
            TypeError: If the input cannot be converted to a string.
        """
        if isinstance(value, str):
            return value
        if isinstance(value, BaseMessage):
            return _text_from_content(value.content)
        if isinstance(value, BasePromptTemplate):
            try:
                return str(value.format())
            except (KeyError, ValueError) as e:
                logger.debug("Failed to format prompt template: %s", e)
                return str(value)
        if isinstance(value, list):
            return "\n".join(self._extract_input(item) for item in value)
        for method in ("to_string", "format"):
            if callable(getattr(value, method, None)):
                try:
                    return str(getattr(value, method)())
                except Exception as e:
                    logger.debug("Failed to call %s() method: %s", method, e)
                    break
        try:
            return str(value)
        except Exception as e:
            raise TypeError(
                f"Unsupported input type: {type(value).__name__}. "
                "Cannot convert to string."
            ) from e

    def evaluate(
        self,
        content: str,
        findings: Optional[SanitizationResult],
        config: Optional[RunnableConfig] = None,
    ) -> bool:
        """
        Evaluate findings from Model Armor.

        Dispatches an `on_model_armor_finding` custom event for unsafe
        content when a config is available.

        Returns:
            bool: `True` if the content is safe, `False` on `MATCH_FOUND`.
        """
        is_safe = results.is_safe(findings)
        if not is_safe and config:
            dispatch_custom_event(
                FINDING_EVENT,
                {
                    "text_content": content,
                    "findings": findings,
                    "template_id": self.template_id,
                },
                config=config,
            )

        logger.info(
            "Evaluated content based on Model Armor sanitization response as %s",
            "Safe" if is_safe else "Unsafe",
        )
        return is_safe

    def _enforce(
        self,
        kind: str,
        content: str,
        findings: SanitizationResult,
        config: Optional[RunnableConfig],
        fail_open: Optional[bool],
    ) -> None:
        if self.evaluate(content, findings, config=config):
            return
        effective_fail_open = self.fail_open if fail_open is None else fail_open
        if not effective_fail_open:
            raise ValueError(f"{kind.capitalize()} flagged as unsafe by Model Armor.")
        logger.info(
            "Found following unsafe %s findings from Model Armor: %s", kind, findings
        )
        logger.warning("Continuing for unsafe %s as fail_open flag is true", kind)


class ModelArmorSanitizePromptRunnable(ModelArmorSanitizeBaseRunnable):
    """`Runnable` to sanitize user prompts using Model Armor."""

    def invoke(
        self,
        input: T,
        config: Optional[RunnableConfig] = None,
        fail_open: Optional[bool] = None,
        **kwargs: Any,
    ) -> T:
        """Sanitize a user prompt; the original input is always returned.

        Raises:
            ValueError: If the prompt is unsafe and `fail_open` is `False`.
        """
        content = self._extract_input(input)
        findings = self.sanitize_user_prompt(content)
        self._enforce("prompt", content, findings, config, fail_open)
        return input


class ModelArmorSanitizeResponseRunnable(ModelArmorSanitizeBaseRunnable):
    """`Runnable` to sanitize LLM responses using Model Armor."""

    def invoke(
        self,
        input: T,
        config: Optional[RunnableConfig] = None,
        fail_open: Optional[bool] = None,
        **kwargs: Any,
    ) -> T:
        """Sanitize a model response; the original input is always returned.

        Raises:
            ValueError: If the response is unsafe and `fail_open` is `False`.
        """
        content = self._extract_input(input)
        findings = self.sanitize_model_response(content)
        self._enforce("response", content, findings, config, fail_open)
        return input
