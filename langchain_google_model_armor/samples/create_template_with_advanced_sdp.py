"""
Sample to create a template with advanced Sensitive Data Protection.

Advanced SDP delegates detection to a DLP inspect template and, optionally,
redaction to a DLP deidentify template. Both DLP templates must exist in the
same project and location as the Model Armor template.
"""

from google.cloud import modelarmor_v1

from langchain_google_model_armor import (
    AdvancedSdpConfig,
    FilterSettings,
    ModelArmorTemplateManager,
    RaiFilter,
    TemplateSpec,
)


def create_model_armor_template_with_advanced_sdp(
    project_id: str = "my-project",
    location_id: str = "us-central1",
    template_id: str = "my-template",
    inspect_template_id: str = "my-inspect-template",
    deidentify_template_id: str = "my-deidentify-template",
) -> modelarmor_v1.Template:
    manager = ModelArmorTemplateManager(project=project_id, location=location_id)

    inspect_template = (
        f"projects/{project_id}/locations/{location_id}"
        f"/inspectTemplates/{inspect_template_id}"
    )
    deidentify_template = (
        f"projects/{project_id}/locations/{location_id}"
        f"/deidentifyTemplates/{deidentify_template_id}"
    )

    template = manager.create_template(
        TemplateSpec(
            filters=FilterSettings(
                rai_filters=[
                    RaiFilter(filter_type="DANGEROUS", confidence_level="HIGH"),
                    RaiFilter(
                        filter_type="HARASSMENT", confidence_level="MEDIUM_AND_ABOVE"
                    ),
                    RaiFilter(
                        filter_type="HATE_SPEECH", confidence_level="MEDIUM_AND_ABOVE"
                    ),
                    RaiFilter(
                        filter_type="SEXUALLY_EXPLICIT",
                        confidence_level="MEDIUM_AND_ABOVE",
                    ),
                ],
                sdp=AdvancedSdpConfig(
                    inspect_template=inspect_template,
                    deidentify_template=deidentify_template,
                ),
            )
        ),
        template_id=template_id,
    )
    print(f"Created template with advanced SDP: {template.name}")
    return template


if __name__ == "__main__":
    create_model_armor_template_with_advanced_sdp()
