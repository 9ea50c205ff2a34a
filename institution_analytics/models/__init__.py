"""
Models package initialization.
"""
from .schemas import (
    # Record models
    Scholarship,
    ApplicantProfile,
    Application,
    AnalyticsEvent,
    # Analytics result models
    TimeBucket,
    ScholarshipPerformance,
    Trend,
    Trends,
    Predictions,
    EngagementMetrics,
    Insight,
    Overview,
    AggregationResult,
    # Endpoint models
    InstitutionAnalyticsRequest,
    InstitutionAnalyticsResponse,
    AnalyticsSummaryResponse,
    ErrorResponse,
    TrackerRequest,
    TrackerResponse,
    ExportRequest,
)

__all__ = [
    "Scholarship",
    "ApplicantProfile",
    "Application",
    "AnalyticsEvent",
    "TimeBucket",
    "ScholarshipPerformance",
    "Trend",
    "Trends",
    "Predictions",
    "EngagementMetrics",
    "Insight",
    "Overview",
    "AggregationResult",
    "InstitutionAnalyticsRequest",
    "InstitutionAnalyticsResponse",
    "AnalyticsSummaryResponse",
    "ErrorResponse",
    "TrackerRequest",
    "TrackerResponse",
    "ExportRequest",
]
