"""Break multi-feature website requests into ordered build steps.

A prompt such as "barber shop with booking and a contact form" becomes a
list of features sorted by build priority. Features that need configuration
are walked one at a time through a wizard; the caller owns that cursor.
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping, Sequence
from typing import Any

from wakti.nlu.intents import (
    AnalyzedRequest,
    BusinessPattern,
    DetectedFeature,
    FeaturePattern,
    FeatureType,
)
from wakti.prompts import (
    FEATURE_DEFAULT_TEMPLATE,
    FEATURE_HEADING_TEMPLATE,
    build_brief_header,
)

DEFAULT_BUSINESS_TYPE = "business"


def _patterns(*sources: str) -> tuple[re.Pattern[str], ...]:
    return tuple(re.compile(source, re.IGNORECASE) for source in sources)


FEATURE_PATTERNS: tuple[FeaturePattern, ...] = (
    FeaturePattern(
        type=FeatureType.LANDING,
        patterns=_patterns(
            r"\b(landing|home|main|hero|front)\s*(page|section)?",
            r"\b(website|site)\b",
        ),
        priority=1,
        requires_wizard=False,
        description="Landing page with hero section",
    ),
    FeaturePattern(
        type=FeatureType.BOOKING,
        patterns=_patterns(
            r"\b(book|booking|appointment|schedule|reservation)\s*(page|system|form)?",
            r"\b(haircut|service|salon|barber)\s*(booking|appointment)?",
            r"\bحجز|موعد",
        ),
        priority=2,
        requires_wizard=True,
        description="Booking/appointment system",
    ),
    FeaturePattern(
        type=FeatureType.PRODUCTS,
        patterns=_patterns(
            r"\b(product|shop|store|sell|e-?commerce|catalog|inventory)\s*(page|section)?",
            r"\b(hair\s*products?|items?|merchandise)\b",
            r"\bمتجر|منتج",
        ),
        priority=3,
        requires_wizard=True,
        description="Product catalog/shop",
    ),
    FeaturePattern(
        type=FeatureType.CART,
        patterns=_patterns(
            r"\b(cart|shopping\s*cart|basket)\b",
            r"\b(add\s*to\s*cart|buy\s*multiple)\b",
        ),
        priority=4,
        requires_wizard=False,
        description="Shopping cart",
    ),
    FeaturePattern(
        type=FeatureType.CHECKOUT,
        patterns=_patterns(
            r"\b(checkout|payment|pay)\s*(page)?",
            r"\b(card|credit\s*card)\s*(checkout|payment)?",
        ),
        priority=5,
        requires_wizard=False,
        description="Checkout page",
    ),
    FeaturePattern(
        type=FeatureType.AUTH,
        patterns=_patterns(
            r"\b(login|log\s*in|sign\s*in|signup|sign\s*up|register|account|auth)\s*(page|form)?",
            r"\b(user|member)\s*(account|registration)\b",
            r"\bتسجيل\s*(دخول|جديد)",
        ),
        priority=6,
        requires_wizard=True,
        description="Login/signup pages",
    ),
    FeaturePattern(
        type=FeatureType.ACCOUNT,
        patterns=_patterns(
            r"\b(my\s*account|dashboard|profile|user\s*area)\b",
            r"\b(see|view|track)\s*(booking|order|purchase|appointment)",
            r"\b(booking|order|purchase)\s*(history|list)\b",
        ),
        priority=7,
        requires_wizard=False,
        description="User account dashboard",
    ),
    FeaturePattern(
        type=FeatureType.MEDIA,
        # Build requests only; "show me the gallery" is not a media feature.
        patterns=_patterns(
            r"\b(add|create|build|make)\s*(gallery|photo|image|picture)\s*(upload|section|page|component)",
            r"\b(add|create|build|make)\s*(upload|dropzone)\s*(component|section|area)",
            r"\bرفع\s*(صور|ملف)",
        ),
        priority=8,
        requires_wizard=True,
        description="Image gallery/uploads",
    ),
    FeaturePattern(
        type=FeatureType.CONTACT,
        patterns=_patterns(
            r"\b(contact|contact\s*us|get\s*in\s*touch|reach\s*us)\s*(page|form)?",
            r"\b(message|feedback)\s*(form|us)?\b",
            r"\bتواصل|اتصل",
        ),
        priority=9,
        requires_wizard=True,
        description="Contact form",
    ),
    FeaturePattern(
        type=FeatureType.BILINGUAL,
        patterns=_patterns(
            r"\b(arabic|english|bilingual|language|rtl)\b",
            r"\b(toggle|switch)\s*(language|arabic|english)\b",
            r"\bعربي|انجليزي",
        ),
        priority=10,
        requires_wizard=False,
        description="Bilingual support (EN/AR)",
    ),
)

BUSINESS_PATTERNS: tuple[BusinessPattern, ...] = (
    BusinessPattern(
        re.compile(r"\b(barber|barbershop|barber\s*shop|hair\s*salon|salon)\b", re.I),
        "barber shop",
    ),
    BusinessPattern(
        re.compile(r"\b(restaurant|cafe|coffee|food|dining)\b", re.I), "restaurant"
    ),
    BusinessPattern(
        re.compile(r"\b(gym|fitness|workout|training)\b", re.I), "fitness center"
    ),
    BusinessPattern(
        re.compile(r"\b(clinic|doctor|medical|health)\b", re.I), "medical clinic"
    ),
    BusinessPattern(
        re.compile(r"\b(spa|massage|wellness|beauty)\b", re.I), "spa & wellness"
    ),
    BusinessPattern(
        re.compile(r"\b(store|shop|retail|boutique)\b", re.I), "retail store"
    ),
    BusinessPattern(
        re.compile(r"\b(agency|consulting|service)\b", re.I), "service business"
    ),
)

WIZARD_TYPES: dict[FeatureType, str | None] = {
    FeatureType.LANDING: None,
    FeatureType.BOOKING: "booking",
    FeatureType.PRODUCTS: "product",
    FeatureType.CART: None,
    FeatureType.CHECKOUT: None,
    FeatureType.AUTH: "auth",
    FeatureType.ACCOUNT: None,
    FeatureType.MEDIA: "media",
    FeatureType.CONTACT: "contact",
    FeatureType.BILINGUAL: None,
}


class FeatureAnalyzer:
    """Regex scanner over fixed feature and business-type catalogs."""

    def __init__(
        self,
        features: Sequence[FeaturePattern] = FEATURE_PATTERNS,
        businesses: Sequence[BusinessPattern] = BUSINESS_PATTERNS,
    ) -> None:
        self._features = tuple(features)
        self._businesses = tuple(businesses)

    def analyze(self, prompt: str) -> AnalyzedRequest:
        """Analyze a prompt and extract every requested feature.

        Args:
            prompt: User request text.

        Returns:
            AnalyzedRequest with features sorted by build priority and the
            cursor at the first feature.
        """

        prompt = prompt or ""
        detected = []
        for config in self._features:
            keywords = tuple(
                match.group(0).strip()
                for match in (regex.search(prompt) for regex in config.patterns)
                if match
            )
            if not keywords:
                continue
            detected.append(
                DetectedFeature(
                    type=config.type,
                    priority=config.priority,
                    keywords=keywords,
                    requires_wizard=config.requires_wizard,
                    description=config.description,
                )
            )

        detected.sort(key=lambda feature: feature.priority)

        return AnalyzedRequest(
            original_prompt=prompt,
            business_type=self.detect_business_type(prompt),
            features=tuple(detected),
        )

    def detect_business_type(self, prompt: str) -> str:
        """Return the first matching business type, or "business"."""

        for business in self._businesses:
            if business.pattern.search(prompt or ""):
                return business.type
        return DEFAULT_BUSINESS_TYPE


def analyze_request(prompt: str) -> AnalyzedRequest:
    """Analyze a prompt using the built-in catalogs."""
    return FeatureAnalyzer().analyze(prompt)


def get_next_wizard_feature(
    analysis: AnalyzedRequest,
    start_index: int | None = None,
) -> DetectedFeature | None:
    """Return the first feature needing a wizard at or after the cursor.

    Args:
        analysis: Analyzed request.
        start_index: Index to scan from; defaults to the request's cursor.

    Returns:
        The next wizard feature, or None if every remaining feature can be
        generated directly.
    """

    start = analysis.current_feature_index if start_index is None else start_index
    for feature in analysis.features[max(start, 0):]:
        if feature.requires_wizard:
            return feature
    return None


def get_non_wizard_features(analysis: AnalyzedRequest) -> tuple[DetectedFeature, ...]:
    """Return the features that can be generated without configuration."""
    return tuple(f for f in analysis.features if not f.requires_wizard)


def generate_structured_prompt(
    analysis: AnalyzedRequest,
    wizard_configs: Mapping[FeatureType | str, Any] | None = None,
) -> str:
    """Serialize detected features and wizard answers into a build brief.

    Args:
        analysis: Analyzed request.
        wizard_configs: Wizard output keyed by feature type. Features
            without a config get a one-line default instruction.

    Returns:
        Markdown-ish brief for the code generator.
    """

    configs = wizard_configs or {}
    lines = [build_brief_header(analysis.business_type), ""]

    for feature in analysis.features:
        config = configs.get(feature.type, configs.get(feature.type.value))
        lines.append(FEATURE_HEADING_TEMPLATE.format(description=feature.description))
        if config:
            lines.append(json.dumps(config, indent=2, ensure_ascii=False, default=str))
        else:
            lines.append(
                FEATURE_DEFAULT_TEMPLATE.format(description=feature.description.lower())
            )
        lines.append("")

    return "\n".join(lines)


def feature_to_wizard_type(feature: FeatureType | str) -> str | None:
    """Map a feature to the wizard that configures it, if any."""

    try:
        return WIZARD_TYPES[FeatureType(feature)]
    except ValueError:
        return None


def create_feature_summary(analysis: AnalyzedRequest) -> str:
    """Create a bullet list of detected features for display."""

    if not analysis.features:
        return "No specific features detected"

    feature_list = "\n".join(
        f"• {f.description}{' (needs configuration)' if f.requires_wizard else ''}"
        for f in analysis.features
    )
    return (
        f"Detected {len(analysis.features)} features for your "
        f"{analysis.business_type}:\n{feature_list}"
    )
