"""Prompt templates for build briefs sent to the code generator."""

BUILD_BRIEF_HEADER_TEMPLATE = (
    "Create a {business_type} website with the following features:"
)
FEATURE_HEADING_TEMPLATE = "## {description}"
FEATURE_DEFAULT_TEMPLATE = "Include a {description}"


def build_brief_header(business_type: str) -> str:
    """Return the opening line of a build brief for the given business."""
    return BUILD_BRIEF_HEADER_TEMPLATE.format(business_type=business_type)
