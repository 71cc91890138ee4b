"""Extract sports match results from raw web-search snippets.

Each snippet is scanned for a score and a pair of team names. Snippets that
carry both become winner/loser rows; when none do, the whole list falls back
to a plain title/source table.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from urllib.parse import urlsplit

from wakti.search.results import (
    ClassifiedResults,
    GenericRow,
    ParsedMatchRow,
    SearchSnippet,
    coerce_snippets,
)

logger = logging.getLogger(__name__)

HIGHLIGHT_MAX_CHARS = 140
HIGHLIGHT_ELLIPSIS = "…"
HIGHLIGHT_PLACEHOLDER = "—"

_WHITESPACE_RE = re.compile(r"\s+")
_BOILERPLATE_RE = re.compile(
    r"(consent|cookie|advertising|privacy|powered by onetrust|accept all"
    r"|subscribe now|accept cookies)",
    re.IGNORECASE,
)

_SCORE_RE = re.compile(r"\b(\d+)\s*[-–x:]\s*(\d+)\b", re.ASCII)

_TEAM_MAX_CHARS = 60

_TEAMS_RE = re.compile(
    r"""
    ([^,;\-|]{1,%(n)d}?)         # Team A
    \s*
    (?:vs\.?|\ v\ |\ vs\ |\ @\ |\ over\ |\ beat|\ beats|\ defeats|\ def\.)
    \s*
    ([^,;\-|(\[]{1,%(n)d})       # Team B
    """
    % {"n": _TEAM_MAX_CHARS},
    re.IGNORECASE | re.VERBOSE,
)

_VERBAL_WIN_RE = re.compile(r"(def\.|defeats|beats|beat|over)", re.IGNORECASE)

_PARENTHETICAL_RE = re.compile(r"\(.*?\)")
_BRACKETED_RE = re.compile(r"\[.*?\]")
_RECAP_WORDS_RE = re.compile(
    r"\b(Game\s*Recap|Highlights|Preview|Report|Live\s*Blog)\b", re.IGNORECASE
)
_OUTLET_WORDS_RE = re.compile(
    r"\b(NHL\.com|NBA\.com|MLB\.com|ESPN|TSN|Sportsnet|BBC|Sky\s*Sports)\b",
    re.IGNORECASE,
)

_MARKDOWN_EMPHASIS_RE = re.compile(r"[#*_`]+")
_SENTENCE_SPLIT_RE = re.compile(r"(?<=[.!?])\s+")


def classify(snippets: Iterable[object] | None) -> ClassifiedResults:
    """Classify search snippets into sports rows or a generic fallback.

    Args:
        snippets: Snippets (or decoded JSON mappings) in display order.

    Returns:
        ClassifiedResults holding the rows that passed the confidence gate,
        or a generic row for every snippet when none did.
    """

    items = coerce_snippets(snippets or ())

    rows: list[ParsedMatchRow] = []
    for index, snippet in enumerate(items):
        row = parse_match_row(snippet)
        if row is None:
            logger.debug(f"Snippet {index} rejected as match result")
            continue
        rows.append(row)

    if rows:
        logger.debug(f"Parsed {len(rows)} of {len(items)} snippets as match results")
        return ClassifiedResults(rows=tuple(rows))

    logger.debug(f"No match results in {len(items)} snippets, using generic table")
    return ClassifiedResults(generic_rows=tuple(_generic_row(s) for s in items))


def parse_match_row(snippet: SearchSnippet) -> ParsedMatchRow | None:
    """Parse one snippet into a match row.

    Returns:
        ParsedMatchRow if a score and two team names were found, else None.
    """

    title = clean_text(snippet.title)
    content = clean_text(snippet.content)

    title_score = _SCORE_RE.search(title)
    score_match = title_score or _SCORE_RE.search(content)
    if score_match is None:
        return None

    teams_source = title
    teams = _TEAMS_RE.search(title)
    if teams is None:
        teams_source = content
        teams = _TEAMS_RE.search(content)
    if teams is None:
        return None

    team_score = _SCORE_RE.search(teams_source)
    team_a = clean_team(_team_text(teams, 1, team_score))
    team_b = clean_team(_team_text(teams, 2, team_score))
    if not team_a or not team_b:
        return None

    winner, loser, is_draw = _assign_result(
        team_a,
        team_b,
        score_match.group(1),
        score_match.group(2),
        title,
    )

    highlight_source = content if title_score else (content or title)

    return ParsedMatchRow(
        winner=winner,
        loser=loser,
        score=f"{score_match.group(1)}-{score_match.group(2)}",
        highlights=extract_highlights(highlight_source),
        source_host=host_from_url(snippet.url),
        url=snippet.url or "",
        is_draw=is_draw,
    )


def clean_text(value: str | None) -> str:
    """Collapse whitespace and drop cookie/consent/ad boilerplate."""

    if not value:
        return ""
    collapsed = _WHITESPACE_RE.sub(" ", value).strip()
    stripped = _BOILERPLATE_RE.sub("", collapsed)
    return _WHITESPACE_RE.sub(" ", stripped).strip()


def clean_team(value: str | None) -> str:
    """Strip recap and outlet noise from a team name.

    Numbers are kept, so names such as "Schalke 04" survive intact.
    """

    if not value:
        return ""
    name = _PARENTHETICAL_RE.sub("", value)
    name = _BRACKETED_RE.sub("", name)
    name = _RECAP_WORDS_RE.sub("", name)
    name = _OUTLET_WORDS_RE.sub("", name)
    return _WHITESPACE_RE.sub(" ", name).strip()


def extract_highlights(text: str) -> str:
    """Return the first one or two sentences, capped at 140 characters."""

    cleaned = _MARKDOWN_EMPHASIS_RE.sub("", clean_text(text)).strip()
    sentences = [s for s in _SENTENCE_SPLIT_RE.split(cleaned) if s]
    highlights = " ".join(sentences[:2])

    if len(highlights) > HIGHLIGHT_MAX_CHARS:
        highlights = highlights[:HIGHLIGHT_MAX_CHARS].rstrip() + HIGHLIGHT_ELLIPSIS

    return highlights or HIGHLIGHT_PLACEHOLDER


def host_from_url(url: str | None) -> str:
    """Return the URL hostname without a leading "www.", or "" if unparsable."""

    if not url:
        return ""
    try:
        hostname = urlsplit(url).hostname
    except ValueError:
        return ""
    if not hostname:
        return ""
    return hostname.removeprefix("www.")


def _team_text(teams: re.Match, group: int, score: re.Match | None) -> str:
    """Return a team capture with any overlapping score span cut away."""

    start, end = teams.span(group)
    if score is not None and score.start() < end and score.end() > start:
        if score.start() <= start:
            start = score.end()
        else:
            end = score.start()
    return teams.string[start:end] if start < end else ""


def _compare_scores(score_a: str, score_b: str) -> int:
    """Compare two ASCII digit strings numerically without int()."""

    a = score_a.lstrip("0") or "0"
    b = score_b.lstrip("0") or "0"
    if len(a) != len(b):
        return 1 if len(a) > len(b) else -1
    if a == b:
        return 0
    return 1 if a > b else -1


def _assign_result(
    team_a: str,
    team_b: str,
    score_a: str,
    score_b: str,
    title: str,
) -> tuple[str, str, bool]:
    order = _compare_scores(score_a, score_b)
    if order > 0:
        return team_a, team_b, False
    if order < 0:
        return team_b, team_a, False

    # Level score: only a verbal cue in the title names a winner.
    if _VERBAL_WIN_RE.search(title):
        return team_a, team_b, False
    return team_a, team_b, True


def _generic_row(snippet: SearchSnippet) -> GenericRow:
    host = host_from_url(snippet.url)
    return GenericRow(
        title=(snippet.title or "").strip() or host or "-",
        source=host,
        url=snippet.url or "",
    )
