"""Render classified search results as markdown tables."""

from __future__ import annotations

from collections.abc import Sequence

from wakti.search.results import ClassifiedResults, GenericRow, ParsedMatchRow

EMPTY_CELL = "-"

HEADERS: dict[str, dict[str, str]] = {
    "en": {
        "winner": "Winner",
        "loser": "Loser",
        "score": "Score",
        "highlights": "Highlights",
        "source": "Source",
        "title": "Title",
        "updated": "Updated",
        "draw": "draw",
    },
    "ar": {
        "winner": "الفائز",
        "loser": "الخاسر",
        "score": "النتيجة",
        "highlights": "أبرز اللحظات",
        "source": "المصدر",
        "title": "العنوان",
        "updated": "آخر تحديث",
        "draw": "تعادل",
    },
}


def render_results_table(
    results: ClassifiedResults,
    language: str = "en",
    updated_at: str | None = None,
) -> list[str]:
    """Render classified results as markdown table lines.

    Args:
        results: Output of the result classifier.
        language: "en" or "ar" headers; anything else falls back to English.
        updated_at: Optional freshness label printed above the table.

    Returns:
        Lines of markdown, empty when there is nothing to show.
    """

    if results.is_empty:
        return []

    headers = HEADERS.get(language, HEADERS["en"])
    lines = []
    if updated_at:
        lines.extend([f"{headers['updated']}: {updated_at}", ""])

    if results.is_sports:
        lines.extend(_render_match_rows(results.rows, headers))
    else:
        lines.extend(_render_generic_rows(results.generic_rows, headers))
    return lines


def _render_match_rows(
    rows: Sequence[ParsedMatchRow],
    headers: dict[str, str],
) -> list[str]:
    lines = [
        _row(
            headers["winner"],
            headers["loser"],
            headers["score"],
            headers["highlights"],
            headers["source"],
        ),
        "| --- | --- | :---: | --- | --- |",
    ]
    for row in rows:
        score = f"{row.score} ({headers['draw']})" if row.is_draw else row.score
        lines.append(
            _row(
                f"**{_escape(row.winner)}**",
                _escape(row.loser),
                score,
                _escape(row.highlights),
                _link(row.source_host or EMPTY_CELL, row.url),
            )
        )
    return lines


def _render_generic_rows(
    rows: Sequence[GenericRow],
    headers: dict[str, str],
) -> list[str]:
    lines = [_row(headers["title"], headers["source"]), "| --- | --- |"]
    for row in rows:
        lines.append(
            _row(_link(_escape(row.title), row.url), _escape(row.source) or EMPTY_CELL)
        )
    return lines


def _row(*cells: str) -> str:
    return "| " + " | ".join(cells) + " |"


def _link(text: str, url: str) -> str:
    if not url:
        return text
    return f"[{text}]({url.replace(' ', '%20')})"


def _escape(value: str) -> str:
    return value.replace("|", "\\|").strip()
