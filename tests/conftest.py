"""Shared pytest fixtures for test infrastructure."""

import pytest

from wakti.search.results import SearchSnippet


@pytest.fixture
def sports_snippets() -> list[SearchSnippet]:
    """Provide a search result list mixing match reports and noise.

    Returns:
        list[SearchSnippet]: Two parseable match reports around an article
        without a score.
    """
    return [
        SearchSnippet(
            title="Lakers beat Celtics 102-98, full recap",
            url="https://www.nba.com/game/lal-vs-bos",
            content=(
                "LeBron James scored 31 points. Anthony Davis added 20 rebounds. "
                "The Lakers close the road trip on Friday."
            ),
        ),
        SearchSnippet(
            title="Trade deadline rumours",
            url="https://www.espn.com/nba/story",
            content="Several teams are looking at guards before the deadline.",
        ),
        SearchSnippet(
            title="Maple Leafs vs Bruins (Game Recap)",
            url="https://sportsnet.ca/nhl/recap",
            content="Final score 2-4 in Boston. The Bruins scored twice late.",
        ),
    ]


@pytest.fixture
def news_snippets() -> list[dict[str, str]]:
    """Provide decoded search-API results with no match results in them.

    Returns:
        list[dict[str, str]]: Raw result mappings as a search API returns them.
    """
    return [
        {
            "title": "City council approves new park",
            "url": "https://www.localnews.example/park",
            "content": "The plan was approved on Monday.",
        },
        {
            "title": "",
            "url": "https://weather.example/today",
            "content": "Sunny with light winds.",
        },
        {"content": "No title or url here."},
    ]
