"""Detect the kind of build request behind an AI coder prompt.

Each catalog category is scored by keyword and regex hits. The best category
decides whether clarifying questions should be asked before generating code.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from wakti.nlu.intents import DetectedIntent, IntentPattern, IntentType

KEYWORD_WEIGHT = 0.15
PATTERN_WEIGHT = 0.25
MULTI_INTENT_MIN_CONFIDENCE = 0.3


def _patterns(*sources: str) -> tuple[re.Pattern[str], ...]:
    return tuple(re.compile(source, re.IGNORECASE) for source in sources)


INTENT_PATTERNS: tuple[IntentPattern, ...] = (
    IntentPattern(
        type=IntentType.AUTHENTICATION,
        keywords=(
            "auth",
            "login",
            "signup",
            "sign up",
            "sign in",
            "register",
            "password",
            "oauth",
            "sso",
            "authentication",
        ),
        patterns=_patterns(
            r"add\s+(user\s+)?auth(entication)?",
            r"login\s+(page|form|system)",
            r"sign\s*(up|in)\s+(page|form|system)",
            r"user\s+registration",
            r"password\s+reset",
        ),
        min_confidence_for_questions=0.6,
    ),
    IntentPattern(
        type=IntentType.DASHBOARD,
        keywords=(
            "dashboard",
            "admin panel",
            "control panel",
            "analytics",
            "stats",
            "metrics",
            "overview",
        ),
        patterns=_patterns(
            r"create\s+(a\s+)?dashboard",
            r"admin\s+panel",
            r"control\s+panel",
            r"analytics\s+(page|dashboard)",
            r"user\s+dashboard",
        ),
        min_confidence_for_questions=0.5,
    ),
    IntentPattern(
        type=IntentType.FORMS,
        keywords=(
            "form",
            "input",
            "validation",
            "submit",
            "fields",
            "contact form",
            "survey",
        ),
        patterns=_patterns(
            r"create\s+(a\s+)?form",
            r"contact\s+form",
            r"form\s+validation",
            r"input\s+fields",
            r"multi-step\s+form",
        ),
        min_confidence_for_questions=0.5,
    ),
    IntentPattern(
        type=IntentType.ADMIN,
        keywords=(
            "admin",
            "roles",
            "permissions",
            "access control",
            "rbac",
            "user management",
            "moderator",
        ),
        patterns=_patterns(
            r"admin\s+(system|panel|access)",
            r"role\s+based\s+access",
            r"user\s+roles",
            r"permission\s+(system|management)",
            r"access\s+control",
        ),
        min_confidence_for_questions=0.7,
    ),
    IntentPattern(
        type=IntentType.NOTIFICATIONS,
        keywords=("notification", "notify", "alert", "push", "email", "sms", "toast"),
        patterns=_patterns(
            r"add\s+notifications?",
            r"push\s+notifications?",
            r"email\s+notifications?",
            r"notification\s+system",
            r"alert\s+system",
        ),
        min_confidence_for_questions=0.5,
    ),
    IntentPattern(
        type=IntentType.DATABASE,
        keywords=("database", "supabase", "table", "schema", "migration", "crud", "data"),
        patterns=_patterns(
            r"create\s+(a\s+)?table",
            r"database\s+schema",
            r"add\s+crud",
            r"supabase\s+integration",
            r"data\s+model",
        ),
        min_confidence_for_questions=0.4,
    ),
    IntentPattern(
        type=IntentType.API,
        keywords=("api", "endpoint", "rest", "fetch", "backend", "server", "edge function"),
        patterns=_patterns(
            r"create\s+(an?\s+)?api",
            r"rest\s+api",
            r"edge\s+function",
            r"api\s+endpoint",
            r"backend\s+logic",
        ),
        min_confidence_for_questions=0.4,
    ),
    IntentPattern(
        type=IntentType.UI,
        keywords=(
            "button",
            "component",
            "style",
            "design",
            "layout",
            "responsive",
            "animation",
        ),
        patterns=_patterns(
            r"add\s+(a\s+)?button",
            r"create\s+(a\s+)?component",
            r"style\s+the",
            r"make\s+it\s+responsive",
            r"add\s+animation",
        ),
        # UI tweaks rarely need questions.
        min_confidence_for_questions=0.2,
    ),
)

QUESTION_TEMPLATES: dict[IntentType, tuple[str, ...]] = {
    IntentType.AUTHENTICATION: ("authentication",),
    IntentType.DASHBOARD: ("dashboard",),
    IntentType.FORMS: ("forms",),
    IntentType.ADMIN: ("admin",),
    IntentType.NOTIFICATIONS: ("notifications",),
}

DATABASE_KEYWORDS = (
    "database",
    "table",
    "schema",
    "migration",
    "supabase",
    "store",
    "save",
    "persist",
    "crud",
    "data model",
    "user data",
    "backend",
    "authentication",
    "auth",
    "roles",
    "permissions",
    "records",
)

INTENT_DESCRIPTIONS: dict[IntentType, dict[str, str]] = {
    IntentType.AUTHENTICATION: {"en": "User Authentication", "ar": "مصادقة المستخدم"},
    IntentType.DASHBOARD: {"en": "Dashboard/Panel", "ar": "لوحة التحكم"},
    IntentType.FORMS: {"en": "Form Creation", "ar": "إنشاء نموذج"},
    IntentType.ADMIN: {"en": "Admin System", "ar": "نظام الإدارة"},
    IntentType.NOTIFICATIONS: {"en": "Notifications", "ar": "الإشعارات"},
    IntentType.DATABASE: {"en": "Database Changes", "ar": "تغييرات قاعدة البيانات"},
    IntentType.API: {"en": "API/Backend", "ar": "API/الخلفية"},
    IntentType.UI: {"en": "UI Component", "ar": "مكون واجهة"},
    IntentType.SIMPLE: {"en": "Simple Request", "ar": "طلب بسيط"},
}


@dataclass(frozen=True)
class _Score:
    pattern: IntentPattern
    confidence: float
    keywords: tuple[str, ...]


class IntentDetector:
    """Keyword and regex scorer over a fixed intent catalog.

    Strategy:
    - Each catalog keyword found in the lowercased prompt adds 0.15.
    - Each catalog regex found in the prompt adds 0.25.
    - Scores are capped at 1.0; ties keep catalog order.
    """

    def __init__(self, patterns: Sequence[IntentPattern] = INTENT_PATTERNS) -> None:
        self._patterns: tuple[IntentPattern, ...] = tuple(patterns)

    def detect(self, prompt: str) -> DetectedIntent:
        """Detect the primary intent of a prompt.

        Args:
            prompt: User request text.

        Returns:
            DetectedIntent for the best-scoring category, or the ``simple``
            intent when nothing matched.
        """

        scores = [score for score in self._score_all(prompt) if score.confidence > 0]
        if not scores:
            return DetectedIntent(type=IntentType.SIMPLE, confidence=1.0)

        scores.sort(key=lambda score: score.confidence, reverse=True)
        top = scores[0]
        return DetectedIntent(
            type=top.pattern.type,
            confidence=top.confidence,
            keywords=top.keywords,
            should_ask_questions=top.confidence
            >= top.pattern.min_confidence_for_questions,
            suggested_question_templates=QUESTION_TEMPLATES.get(top.pattern.type, ()),
        )

    def detect_multiple(self, prompt: str) -> tuple[DetectedIntent, ...]:
        """Detect every reasonably confident intent in a prompt.

        Each category scoring at least 0.3 is reported, flagged for
        questions against its own threshold.
        """

        intents = []
        for score in self._score_all(prompt):
            if score.confidence < MULTI_INTENT_MIN_CONFIDENCE:
                continue
            should_ask = score.confidence >= score.pattern.min_confidence_for_questions
            intents.append(
                DetectedIntent(
                    type=score.pattern.type,
                    confidence=score.confidence,
                    keywords=score.keywords,
                    should_ask_questions=should_ask,
                    suggested_question_templates=(
                        (score.pattern.type.value,) if should_ask else ()
                    ),
                )
            )

        intents.sort(key=lambda intent: intent.confidence, reverse=True)
        return tuple(intents)

    def _score_all(self, prompt: str) -> list[_Score]:
        return [_score(prompt or "", pattern) for pattern in self._patterns]


def _score(prompt: str, pattern: IntentPattern) -> _Score:
    lowered = prompt.lower()
    keywords = tuple(kw for kw in pattern.keywords if kw.lower() in lowered)
    pattern_hits = sum(1 for regex in pattern.patterns if regex.search(prompt))

    raw = KEYWORD_WEIGHT * len(keywords) + PATTERN_WEIGHT * pattern_hits
    confidence = round(min(raw, 1.0), 4)
    return _Score(pattern=pattern, confidence=confidence, keywords=keywords)


def detect_intent(prompt: str) -> DetectedIntent:
    """Detect the primary intent using the built-in catalog."""
    return IntentDetector().detect(prompt)


def detect_multiple_intents(prompt: str) -> tuple[DetectedIntent, ...]:
    """Detect all confident intents using the built-in catalog."""
    return IntentDetector().detect_multiple(prompt)


def might_need_database_changes(prompt: str) -> bool:
    """Check whether a prompt likely touches persisted data."""

    lowered = (prompt or "").lower()
    return any(keyword in lowered for keyword in DATABASE_KEYWORDS)


def get_intent_description(intent: DetectedIntent, language: str = "en") -> str:
    """Return a human-readable label for an intent in English or Arabic."""

    labels = INTENT_DESCRIPTIONS[intent.type]
    return labels["ar"] if language == "ar" else labels["en"]
