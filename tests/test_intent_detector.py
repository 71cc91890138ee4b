import re

from wakti.nlu.intent_detector import (
    INTENT_PATTERNS,
    IntentDetector,
    detect_intent,
    detect_multiple_intents,
    get_intent_description,
    might_need_database_changes,
)
from wakti.nlu.intents import DetectedIntent, IntentPattern, IntentType


def test_detect_intent_authentication_asks_questions() -> None:
    intent = detect_intent("add user authentication login page")

    assert intent == DetectedIntent(
        type=IntentType.AUTHENTICATION,
        confidence=0.95,
        keywords=("auth", "login", "authentication"),
        should_ask_questions=True,
        suggested_question_templates=("authentication",),
    )


def test_detect_intent_ui_below_threshold() -> None:
    intent = detect_intent("make the button blue")

    assert intent.type == IntentType.UI
    assert intent.confidence == 0.15
    assert intent.should_ask_questions is False
    assert intent.suggested_question_templates == ()


def test_detect_intent_simple_when_nothing_matches() -> None:
    assert detect_intent("hello there") == DetectedIntent(
        type=IntentType.SIMPLE,
        confidence=1.0,
    )


def test_detect_intent_blank_prompt() -> None:
    assert detect_intent("").type == IntentType.SIMPLE


def test_detect_intent_ties_keep_catalog_order() -> None:
    intent = detect_intent("admin dashboard")

    assert intent.type == IntentType.DASHBOARD
    assert intent.confidence == 0.15
    assert intent.should_ask_questions is False


def test_detect_intent_confidence_capped() -> None:
    intent = detect_intent(
        "add user authentication with login page, sign up page, signup, "
        "register, password reset, oauth and sso"
    )

    assert intent.type == IntentType.AUTHENTICATION
    assert intent.confidence == 1.0


def test_detect_intent_no_templates_for_database() -> None:
    intent = detect_intent("create a table with a database schema")

    assert intent.type == IntentType.DATABASE
    assert intent.should_ask_questions is True
    assert intent.suggested_question_templates == ()


def test_detect_multiple_intents_flags_each_category() -> None:
    intents = detect_multiple_intents(
        "create a dashboard with push notifications and a rest api"
    )

    assert [(i.type, i.confidence, i.should_ask_questions) for i in intents] == [
        (IntentType.NOTIFICATIONS, 0.55, True),
        (IntentType.API, 0.55, True),
        (IntentType.DASHBOARD, 0.4, False),
    ]
    assert [i.suggested_question_templates for i in intents] == [
        ("notifications",),
        ("api",),
        (),
    ]


def test_detect_multiple_intents_drops_weak_matches() -> None:
    assert detect_multiple_intents("make the button blue") == ()


def test_confidence_always_in_unit_range() -> None:
    detector = IntentDetector()
    prompts = ["", "form", "add crud to the database schema and data model", "x" * 500]

    for prompt in prompts:
        assert 0.0 <= detector.detect(prompt).confidence <= 1.0


def test_custom_catalog() -> None:
    detector = IntentDetector(
        patterns=[
            IntentPattern(
                type=IntentType.FORMS,
                keywords=("survey",),
                patterns=(re.compile(r"net\s+promoter", re.IGNORECASE),),
                min_confidence_for_questions=0.3,
            )
        ]
    )

    intent = detector.detect("Build a Net Promoter survey")

    assert intent.type == IntentType.FORMS
    assert intent.confidence == 0.4
    assert intent.should_ask_questions is True


def test_catalog_is_immutable_tuple() -> None:
    assert isinstance(INTENT_PATTERNS, tuple)
    assert [p.type for p in INTENT_PATTERNS][0] == IntentType.AUTHENTICATION


def test_might_need_database_changes() -> None:
    assert might_need_database_changes("save user data for later") is True
    assert might_need_database_changes("make the button blue") is False


def test_get_intent_description_languages() -> None:
    intent = detect_intent("add user authentication login page")

    assert get_intent_description(intent) == "User Authentication"
    assert get_intent_description(intent, "ar") == "مصادقة المستخدم"
