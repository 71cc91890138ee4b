"""Sports result extraction from web-search snippets."""

from wakti.search.result_classifier import classify, parse_match_row
from wakti.search.results import (
    ClassifiedResults,
    GenericRow,
    InvalidSnippetPayloadError,
    ParsedMatchRow,
    SearchSnippet,
    load_snippets,
)

__all__ = [
    "ClassifiedResults",
    "GenericRow",
    "InvalidSnippetPayloadError",
    "ParsedMatchRow",
    "SearchSnippet",
    "classify",
    "load_snippets",
    "parse_match_row",
]
