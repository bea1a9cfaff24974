"""Service layer: analysis, review, mapping-rule versioning, ingestion, course synthesis."""

from curriculum_ops.services.analyzer import BatchAnalysisResult, ImpactAnalyzer
from curriculum_ops.services.course_synthesizer import CourseSynthesizer
from curriculum_ops.services.ingest_service import UpdateIngestService
from curriculum_ops.services.mapping_rule_service import MappingRuleService
from curriculum_ops.services.review_service import ReviewService

__all__ = [
    "BatchAnalysisResult",
    "CourseSynthesizer",
    "ImpactAnalyzer",
    "MappingRuleService",
    "ReviewService",
    "UpdateIngestService",
]
