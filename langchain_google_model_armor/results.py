"""Readers for `SanitizationResult` messages returned by Model Armor."""

from typing import Any, Dict, List, Optional

from google.cloud.modelarmor_v1 import (
    FilterMatchState,
    FilterResult,
    InvocationResult,
    RaiFilterResult,
    SanitizationResult,
    SdpFinding,
)
from pydantic import BaseModel

RAI = "rai"
MALICIOUS_URIS = "malicious_uris"
SDP = "sdp"
PI_AND_JAILBREAK = "pi_and_jailbreak"
CSAM = "csam"

# Filter result key -> the oneof field holding that category's result.
_RESULT_FIELDS = {
    RAI: "rai_filter_result",
    MALICIOUS_URIS: "malicious_uri_filter_result",
    SDP: "sdp_filter_result",
    PI_AND_JAILBREAK: "pi_and_jailbreak_filter_result",
    CSAM: "csam_filter_filter_result",
}


class MaliciousUriMatch(BaseModel):
    """A flagged URI and the `[start, end)` span it occupies in the text."""

    uri: str
    start: int
    end: int


def is_match_found(result: Optional[SanitizationResult]) -> bool:
    """Whether any filter in the template matched."""
    return (
        result is not None
        and result.filter_match_state == FilterMatchState.MATCH_FOUND
    )


def is_safe(result: Optional[SanitizationResult]) -> bool:
    """Whether the content passed every filter.

    A missing result is treated as safe, matching the behaviour of the
    sanitization runnables.
    """
    return not is_match_found(result)


def is_clean(result: SanitizationResult) -> bool:
    """Whether the service evaluated the content and found no match.

    Stricter than `is_safe`: an unspecified match state, as returned when
    the invocation failed, does not count as clean.
    """
    return result.filter_match_state == FilterMatchState.NO_MATCH_FOUND


def is_successful(result: SanitizationResult) -> bool:
    """Whether every filter was evaluated."""
    return result.invocation_result == InvocationResult.SUCCESS


def get_filter_result(
    result: SanitizationResult, category: str
) -> Optional[FilterResult]:
    """Return the `FilterResult` recorded for `category`, if any."""
    if category not in result.filter_results:
        return None
    return result.filter_results[category]


def _category_result(result: SanitizationResult, category: str) -> Any:
    filter_result = get_filter_result(result, category)
    if filter_result is None:
        return None
    field = _RESULT_FIELDS.get(category)
    if field is None or field not in filter_result:
        return None
    return getattr(filter_result, field)


def get_filter_match_state(
    result: SanitizationResult, category: str
) -> FilterMatchState:
    """Match state of a single filter category.

    Returns `FILTER_MATCH_STATE_UNSPECIFIED` when the category was not part of
    the template. The SDP category reports the inspect result when present,
    otherwise the deidentify result.
    """
    category_result = _category_result(result, category)
    if category_result is None:
        return FilterMatchState.FILTER_MATCH_STATE_UNSPECIFIED
    if category == SDP:
        if "inspect_result" in category_result:
            return category_result.inspect_result.match_state
        if "deidentify_result" in category_result:
            return category_result.deidentify_result.match_state
        return FilterMatchState.FILTER_MATCH_STATE_UNSPECIFIED
    return category_result.match_state


def get_rai_filter_type_results(
    result: SanitizationResult,
) -> Dict[str, RaiFilterResult.RaiFilterTypeResult]:
    """Per-type RAI results keyed by filter type name (e.g. `dangerous`)."""
    rai_result = _category_result(result, RAI)
    if rai_result is None:
        return {}
    return dict(rai_result.rai_filter_type_results)


def get_malicious_uri_matches(result: SanitizationResult) -> List[MaliciousUriMatch]:
    """Flatten malicious URI findings into one entry per matched location."""
    uri_result = _category_result(result, MALICIOUS_URIS)
    if uri_result is None:
        return []

    matches = []
    for item in uri_result.malicious_uri_matched_items:
        for location in item.locations:
            matches.append(
                MaliciousUriMatch(
                    uri=item.uri, start=int(location.start), end=int(location.end)
                )
            )
    return matches


def get_sdp_findings(result: SanitizationResult) -> List[SdpFinding]:
    """Findings reported by the SDP inspect step."""
    sdp_result = _category_result(result, SDP)
    if sdp_result is None or "inspect_result" not in sdp_result:
        return []
    return list(sdp_result.inspect_result.findings)


def get_deidentified_text(
    result: SanitizationResult, default: Optional[str] = None
) -> Optional[str]:
    """Text returned by the SDP deidentify step, or `default`.

    Only advanced SDP templates with a deidentify template produce
    deidentified data.
    """
    sdp_result = _category_result(result, SDP)
    if sdp_result is None or "deidentify_result" not in sdp_result:
        return default
    deidentify_result = sdp_result.deidentify_result
    if deidentify_result.match_state != FilterMatchState.MATCH_FOUND:
        return default
    return deidentify_result.data.text or default
