"""
Structured warning/error codes for layout runs.
Use these keys in reports; map to user-facing messages in the UI.
"""

# Known keys (attached to LayoutReport.warnings or returned by runners)
NO_CANDIDATE_FITS = "no_candidate_fits"
UNKNOWN_PREVIOUS_LAYOUT = "unknown_previous_layout"
PREVIEW_SHRUNK = "preview_shrunk"
SCENARIO_INVALID = "scenario_invalid"
RUN_FAILED = "run_failed"

# User-facing messages (short, actionable)
USER_MESSAGES: dict[str, str] = {
    NO_CANDIDATE_FITS: "Menu and preview do not fit the viewport together; layout overflows.",
    UNKNOWN_PREVIOUS_LAYOUT: "Previous layout id is not offered by this strategy; layout chosen afresh.",
    PREVIEW_SHRUNK: "Preview was scaled down to make room for the menu.",
    SCENARIO_INVALID: "Scenario file is malformed. Check viewport, anchor and sizes.",
    RUN_FAILED: "Run failed. Check scenario and inputs.",
}


def user_message(error_key: str | None, fallback: str = "Something went wrong.") -> str:
    """Return a user-facing message for the given key."""
    if not error_key:
        return fallback
    return USER_MESSAGES.get(error_key, fallback)
