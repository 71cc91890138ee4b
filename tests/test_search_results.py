import pytest

from wakti.search.results import (
    ClassifiedResults,
    GenericRow,
    InvalidSnippetPayloadError,
    SearchSnippet,
    coerce_snippets,
    load_snippets,
)


def test_snippet_from_mapping_coerces_missing_and_non_string_fields() -> None:
    snippet = SearchSnippet.from_mapping({"title": "Match", "url": None, "content": 3})

    assert snippet == SearchSnippet(title="Match", url="", content="")


def test_snippet_from_mapping_non_mapping() -> None:
    assert SearchSnippet.from_mapping("not a result") == SearchSnippet()


def test_load_snippets_accepts_bare_list() -> None:
    snippets = load_snippets([{"title": "A"}, {"title": "B", "url": "https://b.example"}])

    assert snippets == [
        SearchSnippet(title="A"),
        SearchSnippet(title="B", url="https://b.example"),
    ]


def test_load_snippets_accepts_results_object() -> None:
    payload = {"query": "lakers score", "results": [{"content": "text"}]}

    assert load_snippets(payload) == [SearchSnippet(content="text")]


@pytest.mark.parametrize("payload", [None, "results", {"results": "nope"}, {"answer": []}])
def test_load_snippets_invalid_payload(payload: object) -> None:
    with pytest.raises(InvalidSnippetPayloadError):
        load_snippets(payload)


def test_coerce_snippets_keeps_existing_snippets() -> None:
    existing = SearchSnippet(title="kept")

    assert coerce_snippets([existing, {"title": "mapped"}]) == [
        existing,
        SearchSnippet(title="mapped"),
    ]


def test_classified_results_views() -> None:
    empty = ClassifiedResults()
    generic = ClassifiedResults(generic_rows=(GenericRow(title="x"),))

    assert empty.is_empty and not empty.is_sports
    assert not generic.is_empty and not generic.is_sports
