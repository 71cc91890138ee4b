"""Data models for web-search snippets and the tables derived from them."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any


class InvalidSnippetPayloadError(ValueError):
    """Raised when a decoded search payload has no usable snippet list."""


@dataclass(frozen=True)
class SearchSnippet:
    """A single search-engine result item.

    Attributes:
        title: Result title, empty when the provider omitted it.
        url: Result URL, empty when absent.
        content: Extracted page text or summary.
    """

    title: str = ""
    url: str = ""
    content: str = ""

    @classmethod
    def from_mapping(cls, data: object) -> "SearchSnippet":
        """Build a snippet from a decoded JSON object.

        Missing keys, non-string values and non-mapping items all
        degrade to empty fields.
        """
        if not isinstance(data, Mapping):
            return cls()
        return cls(
            title=_as_text(data.get("title")),
            url=_as_text(data.get("url")),
            content=_as_text(data.get("content")),
        )


@dataclass(frozen=True)
class ParsedMatchRow:
    """A snippet recognised as a sports match result.

    Attributes:
        winner: Winning team (team A for level scores).
        loser: Losing team.
        score: Score in "A-B" form, in the order it was written.
        highlights: One or two sentences of context, at most 140 chars plus "…".
        source_host: Hostname of the snippet URL without "www.".
        url: Original snippet URL.
        is_draw: Scores were level and no verbal winner cue was found.
    """

    winner: str
    loser: str
    score: str
    highlights: str
    source_host: str = ""
    url: str = ""
    is_draw: bool = False


@dataclass(frozen=True)
class GenericRow:
    """Fallback title/source row used when no snippet parses as a match."""

    title: str
    source: str = ""
    url: str = ""


@dataclass(frozen=True)
class ClassifiedResults:
    """Outcome of classifying a snippet list.

    Exactly one of ``rows`` and ``generic_rows`` is populated, unless the
    input was empty, in which case both are.
    """

    rows: tuple[ParsedMatchRow, ...] = field(default_factory=tuple)
    generic_rows: tuple[GenericRow, ...] = field(default_factory=tuple)

    @property
    def is_sports(self) -> bool:
        """Whether the sports (winner/loser/score) view applies."""
        return bool(self.rows)

    @property
    def is_empty(self) -> bool:
        return not self.rows and not self.generic_rows


def load_snippets(payload: Any) -> list[SearchSnippet]:
    """Extract snippets from a decoded search-API payload.

    Accepts either a bare list of result objects or an object carrying
    them under ``results``.

    Args:
        payload: Decoded JSON value.

    Returns:
        Snippets in input order.

    Raises:
        InvalidSnippetPayloadError: If no result list can be found.
    """
    if isinstance(payload, Mapping):
        payload = payload.get("results")

    if not isinstance(payload, list):
        raise InvalidSnippetPayloadError(
            "Expected a list of results or an object with a 'results' list"
        )

    return [SearchSnippet.from_mapping(item) for item in payload]


def coerce_snippets(items: Iterable[object]) -> list[SearchSnippet]:
    """Normalize a mix of snippets and mappings into snippets."""

    return [
        item if isinstance(item, SearchSnippet) else SearchSnippet.from_mapping(item)
        for item in items
    ]


def _as_text(value: object) -> str:
    if isinstance(value, str):
        return value
    return ""
