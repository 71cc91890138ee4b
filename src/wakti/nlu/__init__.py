"""Natural language understanding for build requests."""

from wakti.nlu.intent_detector import (
    IntentDetector,
    detect_intent,
    detect_multiple_intents,
    get_intent_description,
    might_need_database_changes,
)
from wakti.nlu.intents import (
    AnalyzedRequest,
    DetectedFeature,
    DetectedIntent,
    FeatureType,
    IntentType,
)
from wakti.nlu.request_analyzer import (
    FeatureAnalyzer,
    analyze_request,
    create_feature_summary,
    feature_to_wizard_type,
    generate_structured_prompt,
    get_next_wizard_feature,
    get_non_wizard_features,
)

__all__ = [
    "AnalyzedRequest",
    "DetectedFeature",
    "DetectedIntent",
    "FeatureAnalyzer",
    "FeatureType",
    "IntentDetector",
    "IntentType",
    "analyze_request",
    "create_feature_summary",
    "detect_intent",
    "detect_multiple_intents",
    "feature_to_wizard_type",
    "generate_structured_prompt",
    "get_intent_description",
    "get_next_wizard_feature",
    "get_non_wizard_features",
    "might_need_database_changes",
]
