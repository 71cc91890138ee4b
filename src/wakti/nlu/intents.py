"""Intent and feature data models for build-request NLU."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum


class IntentType(str, Enum):
    """Kinds of build request the AI coder distinguishes."""

    AUTHENTICATION = "authentication"
    DASHBOARD = "dashboard"
    FORMS = "forms"
    ADMIN = "admin"
    NOTIFICATIONS = "notifications"
    DATABASE = "database"
    API = "api"
    UI = "ui"
    SIMPLE = "simple"


class FeatureType(str, Enum):
    """Website features a multi-feature request can ask for."""

    LANDING = "landing"
    BOOKING = "booking"
    PRODUCTS = "products"
    CART = "cart"
    CHECKOUT = "checkout"
    AUTH = "auth"
    ACCOUNT = "account"
    MEDIA = "media"
    CONTACT = "contact"
    BILINGUAL = "bilingual"


@dataclass(frozen=True)
class IntentPattern:
    """Catalog entry describing how to recognise one intent category.

    Attributes:
        type: Intent category.
        keywords: Lowercase substrings, each worth a fixed confidence bump.
        patterns: Compiled regexes, each worth a larger bump.
        min_confidence_for_questions: Confidence at which the category
            warrants clarifying questions.
    """

    type: IntentType
    keywords: tuple[str, ...]
    patterns: tuple[re.Pattern[str], ...]
    min_confidence_for_questions: float


@dataclass(frozen=True)
class DetectedIntent:
    """Structured result of intent detection.

    Attributes:
        type: Winning intent category.
        confidence: Score in [0, 1].
        keywords: Catalog keywords found in the prompt.
        should_ask_questions: Whether to run a clarifying-question wizard.
        suggested_question_templates: Wizard template identifiers.
    """

    type: IntentType
    confidence: float
    keywords: tuple[str, ...] = ()
    should_ask_questions: bool = False
    suggested_question_templates: tuple[str, ...] = ()


@dataclass(frozen=True)
class FeaturePattern:
    """Catalog entry for one website feature."""

    type: FeatureType
    patterns: tuple[re.Pattern[str], ...]
    priority: int
    requires_wizard: bool
    description: str


@dataclass(frozen=True)
class BusinessPattern:
    """Regex naming a business type, e.g. "barber shop"."""

    pattern: re.Pattern[str]
    type: str


@dataclass(frozen=True)
class DetectedFeature:
    """A feature found in a build request.

    Attributes:
        type: Feature category.
        priority: Build order, lower builds first.
        keywords: Text fragments that triggered detection.
        requires_wizard: Whether the feature needs configuration first.
        description: Human-readable description.
    """

    type: FeatureType
    priority: int
    keywords: tuple[str, ...]
    requires_wizard: bool
    description: str


@dataclass(frozen=True)
class AnalyzedRequest:
    """A build request broken down into ordered features.

    ``current_feature_index`` is a cursor into ``features``. The analyzer
    always returns it at 0; callers advance it as wizard steps complete.
    """

    original_prompt: str
    business_type: str
    features: tuple[DetectedFeature, ...]
    current_feature_index: int = 0

    @property
    def total_features(self) -> int:
        return len(self.features)

    @property
    def is_multi_feature(self) -> bool:
        return len(self.features) > 1
