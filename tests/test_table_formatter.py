from wakti.formatter.table_formatter import render_results_table
from wakti.search.result_classifier import classify
from wakti.search.results import ClassifiedResults, GenericRow, ParsedMatchRow


def test_render_sports_table(sports_snippets) -> None:
    lines = render_results_table(classify(sports_snippets))

    assert lines == [
        "| Winner | Loser | Score | Highlights | Source |",
        "| --- | --- | :---: | --- | --- |",
        "| **Lakers** | Celtics | 102-98 | LeBron James scored 31 points. "
        "Anthony Davis added 20 rebounds. | "
        "[nba.com](https://www.nba.com/game/lal-vs-bos) |",
        "| **Bruins** | Maple Leafs | 2-4 | Final score 2-4 in Boston. "
        "The Bruins scored twice late. | "
        "[sportsnet.ca](https://sportsnet.ca/nhl/recap) |",
    ]


def test_render_generic_table_in_arabic_with_updated_line(news_snippets) -> None:
    lines = render_results_table(
        classify(news_snippets),
        language="ar",
        updated_at="10:42",
    )

    assert lines == [
        "آخر تحديث: 10:42",
        "",
        "| العنوان | المصدر |",
        "| --- | --- |",
        "| [City council approves new park](https://www.localnews.example/park) "
        "| localnews.example |",
        "| [weather.example](https://weather.example/today) | weather.example |",
        "| - | - |",
    ]


def test_render_marks_draws() -> None:
    results = ClassifiedResults(
        rows=(
            ParsedMatchRow(
                winner="Arsenal",
                loser="Chelsea",
                score="1-1",
                highlights="—",
                is_draw=True,
            ),
        )
    )

    assert render_results_table(results)[2] == "| **Arsenal** | Chelsea | 1-1 (draw) | — | - |"


def test_render_escapes_pipes() -> None:
    results = ClassifiedResults(generic_rows=(GenericRow(title="Scores | Live"),))

    assert render_results_table(results)[2] == "| Scores \\| Live | - |"


def test_render_empty_results() -> None:
    assert render_results_table(ClassifiedResults()) == []


def test_render_unknown_language_falls_back_to_english() -> None:
    results = ClassifiedResults(generic_rows=(GenericRow(title="x"),))

    assert render_results_table(results, language="fr")[0] == "| Title | Source |"
