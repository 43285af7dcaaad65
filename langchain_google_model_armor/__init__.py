"""**Model Armor** templates, sanitization and LangChain runnables."""

from langchain_google_model_armor.config import ModelArmorParams
from langchain_google_model_armor.dlp import DlpTemplateManager
from langchain_google_model_armor.filters import (
    AdvancedSdpConfig,
    BasicSdpConfig,
    DetectionConfidenceLevel,
    FilterSettings,
    PiAndJailbreakConfig,
    RaiFilter,
    RaiFilterType,
    TemplateMetadata,
    TemplateSpec,
)
from langchain_google_model_armor.floor_settings import ModelArmorFloorSettingsManager
from langchain_google_model_armor.results import MaliciousUriMatch
from langchain_google_model_armor.runnable import (
    ModelArmorSanitizeBaseRunnable,
    ModelArmorSanitizePromptRunnable,
    ModelArmorSanitizeResponseRunnable,
)
from langchain_google_model_armor.sanitizer import (
    ModelArmorSanitizer,
    PromptAndResponseResult,
)
from langchain_google_model_armor.templates import ModelArmorTemplateManager

__all__ = [
    "AdvancedSdpConfig",
    "BasicSdpConfig",
    "DetectionConfidenceLevel",
    "DlpTemplateManager",
    "FilterSettings",
    "MaliciousUriMatch",
    "ModelArmorFloorSettingsManager",
    "ModelArmorParams",
    "ModelArmorSanitizeBaseRunnable",
    "ModelArmorSanitizePromptRunnable",
    "ModelArmorSanitizeResponseRunnable",
    "ModelArmorSanitizer",
    "ModelArmorTemplateManager",
    "PiAndJailbreakConfig",
    "PromptAndResponseResult",
    "RaiFilter",
    "RaiFilterType",
    "TemplateMetadata",
    "TemplateSpec",
]
