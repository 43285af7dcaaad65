"""
Declarative Model Armor template configuration.

The models here describe a template's filters, labels and metadata and
convert to the `google.cloud.modelarmor_v1` messages sent to the API.
Sensitive Data Protection settings are a discriminated union: a template has
either a basic or an advanced SDP configuration, never both.
"""

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from google.cloud import modelarmor_v1
from pydantic import BaseModel, Field, field_validator

RaiFilterType = modelarmor_v1.RaiFilterType
DetectionConfidenceLevel = modelarmor_v1.DetectionConfidenceLevel

_MaliciousUriEnforcement = (
    modelarmor_v1.MaliciousUriFilterSettings.MaliciousUriFilterEnforcement
)
_PiAndJailbreakEnforcement = (
    modelarmor_v1.PiAndJailbreakFilterSettings.PiAndJailbreakFilterEnforcement
)
_SdpBasicEnforcement = modelarmor_v1.SdpBasicConfig.SdpBasicConfigEnforcement


def _coerce_enum(enum_type: Any, value: Any) -> Any:
    # Accept enum member names ("HATE_SPEECH", "high") as well as values.
    if isinstance(value, str):
        try:
            return enum_type[value.upper()]
        except KeyError as e:
            raise ValueError(
                f"Unknown {enum_type.__name__} {value!r}, expected one of "
                f"{', '.join(enum_type.__members__)}."
            ) from e
    return value


class RaiFilter(BaseModel):
    """A responsible-AI filter category and its detection threshold."""

    filter_type: RaiFilterType
    confidence_level: DetectionConfidenceLevel = DetectionConfidenceLevel.HIGH

    @field_validator("filter_type", mode="before")
    @classmethod
    def _parse_filter_type(cls, value: Any) -> Any:
        return _coerce_enum(RaiFilterType, value)

    @field_validator("confidence_level", mode="before")
    @classmethod
    def _parse_confidence_level(cls, value: Any) -> Any:
        return _coerce_enum(DetectionConfidenceLevel, value)

    def to_proto(self) -> modelarmor_v1.RaiFilterSettings.RaiFilter:
        return modelarmor_v1.RaiFilterSettings.RaiFilter(
            filter_type=self.filter_type,
            confidence_level=self.confidence_level,
        )


class BasicSdpConfig(BaseModel):
    """Basic Sensitive Data Protection: a built-in set of info types."""

    mode: Literal["basic"] = "basic"
    enabled: bool = True

    def to_proto(self) -> modelarmor_v1.SdpFilterSettings:
        return modelarmor_v1.SdpFilterSettings(
            basic_config=modelarmor_v1.SdpBasicConfig(
                filter_enforcement=(
                    _SdpBasicEnforcement.ENABLED
                    if self.enabled
                    else _SdpBasicEnforcement.DISABLED
                )
            )
        )


class AdvancedSdpConfig(BaseModel):
    """Advanced Sensitive Data Protection backed by DLP templates.

    Attributes:
        inspect_template: Full name of the DLP inspect template,
            `projects/{project}/locations/{location}/inspectTemplates/{id}`.
        deidentify_template: Optional full name of the DLP deidentify
            template. When set, matched content is returned deidentified.
    """

    mode: Literal["advanced"] = "advanced"
    inspect_template: str
    deidentify_template: Optional[str] = None

    def to_proto(self) -> modelarmor_v1.SdpFilterSettings:
        return modelarmor_v1.SdpFilterSettings(
            advanced_config=modelarmor_v1.SdpAdvancedConfig(
                inspect_template=self.inspect_template,
                deidentify_template=self.deidentify_template or "",
            )
        )


SdpConfig = Annotated[
    Union[BasicSdpConfig, AdvancedSdpConfig], Field(discriminator="mode")
]


class PiAndJailbreakConfig(BaseModel):
    """Prompt injection and jailbreak detection."""

    enabled: bool = True
    confidence_level: DetectionConfidenceLevel = (
        DetectionConfidenceLevel.MEDIUM_AND_ABOVE
    )

    @field_validator("confidence_level", mode="before")
    @classmethod
    def _parse_confidence_level(cls, value: Any) -> Any:
        return _coerce_enum(DetectionConfidenceLevel, value)

    def to_proto(self) -> modelarmor_v1.PiAndJailbreakFilterSettings:
        return modelarmor_v1.PiAndJailbreakFilterSettings(
            filter_enforcement=(
                _PiAndJailbreakEnforcement.ENABLED
                if self.enabled
                else _PiAndJailbreakEnforcement.DISABLED
            ),
            confidence_level=self.confidence_level,
        )


class FilterSettings(BaseModel):
    """The filters a template applies to prompts and responses."""

    rai_filters: List[RaiFilter] = Field(default_factory=list)
    malicious_uri_enabled: bool = False
    pi_and_jailbreak: Optional[PiAndJailbreakConfig] = None
    sdp: Optional[SdpConfig] = None

    def to_proto(self) -> modelarmor_v1.FilterConfig:
        filter_config = modelarmor_v1.FilterConfig()
        if self.rai_filters:
            filter_config.rai_settings = modelarmor_v1.RaiFilterSettings(
                rai_filters=[f.to_proto() for f in self.rai_filters]
            )
        if self.malicious_uri_enabled:
            filter_config.malicious_uri_filter_settings = (
                modelarmor_v1.MaliciousUriFilterSettings(
                    filter_enforcement=_MaliciousUriEnforcement.ENABLED
                )
            )
        if self.pi_and_jailbreak is not None:
            filter_config.pi_and_jailbreak_filter_settings = (
                self.pi_and_jailbreak.to_proto()
            )
        if self.sdp is not None:
            filter_config.sdp_settings = self.sdp.to_proto()
        return filter_config


class TemplateMetadata(BaseModel):
    """Logging toggles stored on a template."""

    log_template_operations: bool = False
    log_sanitize_operations: bool = False

    def to_proto(self) -> modelarmor_v1.Template.TemplateMetadata:
        return modelarmor_v1.Template.TemplateMetadata(
            log_template_operations=self.log_template_operations,
            log_sanitize_operations=self.log_sanitize_operations,
        )


class TemplateSpec(BaseModel):
    """A complete template definition, independent of its resource name."""

    filters: FilterSettings = Field(default_factory=FilterSettings)
    labels: Dict[str, str] = Field(default_factory=dict)
    metadata: Optional[TemplateMetadata] = None

    def to_proto(self, name: Optional[str] = None) -> modelarmor_v1.Template:
        """Build the `Template` message, optionally carrying its resource name."""
        template = modelarmor_v1.Template(
            filter_config=self.filters.to_proto(),
            labels=self.labels,
        )
        if name:
            template.name = name
        if self.metadata is not None:
            template.template_metadata = self.metadata.to_proto()
        return template
