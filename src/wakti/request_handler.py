"""Request handler orchestrating search-result tables and build planning.

Coordinates the result classifier, the table formatter, intent detection and
feature analysis. Wizard progress lives in a per-caller WizardSession.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import Any

from wakti.formatter import render_results_table
from wakti.nlu import (
    AnalyzedRequest,
    DetectedFeature,
    DetectedIntent,
    FeatureAnalyzer,
    FeatureType,
    IntentDetector,
    create_feature_summary,
    feature_to_wizard_type,
    generate_structured_prompt,
    get_next_wizard_feature,
    get_non_wizard_features,
    might_need_database_changes,
)
from wakti.search import classify

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildPlan:
    """Everything the caller needs to decide how to run a build request.

    Attributes:
        prompt: Original request text.
        intent: Primary detected intent.
        analysis: Feature breakdown in build order.
        needs_database_changes: Whether persisted data is likely involved.
        wizard_features: Features that need configuration, in build order.
        direct_features: Features that can be generated right away.
    """

    prompt: str
    intent: DetectedIntent
    analysis: AnalyzedRequest
    needs_database_changes: bool
    wizard_features: tuple[DetectedFeature, ...]
    direct_features: tuple[DetectedFeature, ...]

    @property
    def should_ask_questions(self) -> bool:
        return self.intent.should_ask_questions

    @property
    def requires_wizard(self) -> bool:
        return bool(self.wizard_features)


@dataclass
class WizardSession:
    """Walks the wizard-requiring features of a request one at a time.

    Attributes:
        analysis: Analyzed request; its cursor is advanced on completion.
        configs: Wizard answers collected so far, keyed by feature type.
    """

    analysis: AnalyzedRequest
    configs: dict[FeatureType, Any] = field(default_factory=dict)

    @property
    def current_feature(self) -> DetectedFeature | None:
        return get_next_wizard_feature(self.analysis)

    @property
    def wizard_type(self) -> str | None:
        feature = self.current_feature
        if feature is None:
            return None
        return feature_to_wizard_type(feature.type)

    @property
    def is_complete(self) -> bool:
        return self.current_feature is None

    def complete(self, config: Any) -> DetectedFeature | None:
        """Record the current feature's configuration and move on.

        Args:
            config: Wizard output for the current feature.

        Returns:
            The next feature needing a wizard, or None when done.

        Raises:
            ValueError: If the session has no pending wizard feature.
        """
        feature = self.current_feature
        if feature is None:
            raise ValueError("No wizard feature is pending")

        self.configs[feature.type] = config
        index = self.analysis.features.index(feature)
        self.analysis = replace(self.analysis, current_feature_index=index + 1)
        logger.debug(f"Wizard completed for feature '{feature.type.value}'")
        return self.current_feature

    def build_prompt(self) -> str:
        """Return the build brief including every collected configuration."""
        return generate_structured_prompt(self.analysis, self.configs)

    def summary(self) -> str:
        return create_feature_summary(self.analysis)


class RequestHandler:
    """Orchestrator for search-result tables and AI coder build requests."""

    def __init__(
        self,
        intent_detector: IntentDetector | None = None,
        feature_analyzer: FeatureAnalyzer | None = None,
        language: str = "en",
    ) -> None:
        """Initialize the handler.

        Args:
            intent_detector: Detector to use; defaults to the built-in catalog.
            feature_analyzer: Analyzer to use; defaults to the built-in catalogs.
            language: Table header language ("en" or "ar").
        """
        self.intent_detector = intent_detector or IntentDetector()
        self.feature_analyzer = feature_analyzer or FeatureAnalyzer()
        self.language = language

    def render_search_results(
        self,
        snippets: Iterable[object] | None,
        updated_at: str | None = None,
    ) -> str | None:
        """Classify snippets and render them as a markdown table.

        Args:
            snippets: Search snippets or decoded result mappings.
            updated_at: Optional freshness label.

        Returns:
            Rendered table, or None when there were no snippets.
        """
        results = classify(snippets)
        lines = render_results_table(
            results,
            language=self.language,
            updated_at=updated_at,
        )
        if not lines:
            return None

        view = "sports" if results.is_sports else "generic"
        logger.info(f"Rendered {view} results table")
        return "\n".join(lines)

    def plan_build_request(self, prompt: str) -> BuildPlan:
        """Detect intent and features for a build request.

        Args:
            prompt: User's build request.

        Returns:
            BuildPlan describing questions, wizard steps and direct features.
        """
        prompt = prompt or ""
        intent = self.intent_detector.detect(prompt)
        analysis = self.feature_analyzer.analyze(prompt)

        plan = BuildPlan(
            prompt=prompt,
            intent=intent,
            analysis=analysis,
            needs_database_changes=might_need_database_changes(prompt),
            wizard_features=tuple(f for f in analysis.features if f.requires_wizard),
            direct_features=get_non_wizard_features(analysis),
        )

        logger.info(
            f"Planned build request: intent={intent.type.value} "
            f"confidence={intent.confidence:.2f} "
            f"features={analysis.total_features} "
            f"wizards={len(plan.wizard_features)}"
        )
        # Security: prompt text is user content, keep it out of INFO logs
        logger.debug(f"Build request prompt: {prompt}")
        return plan

    def start_wizard(self, plan: BuildPlan) -> WizardSession:
        """Open a wizard session positioned at the plan's first feature."""
        return WizardSession(analysis=plan.analysis)
