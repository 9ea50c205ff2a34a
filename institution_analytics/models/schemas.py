"""
Pydantic models for records, request/response schemas and analytics results.
"""
from datetime import datetime
from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys, accepting either spelling on input."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================================
# RECORD MODELS (rows read from the record store)
# ============================================================================

class RecordModel(BaseModel):
    """Base for store rows; numeric ids are accepted as strings."""
    model_config = ConfigDict(coerce_numbers_to_str=True)


class Scholarship(RecordModel):
    """A scholarship owned by an institution."""
    id: str
    institution_id: str | None = None
    title: str = ""
    amount: float = 0
    is_active: bool = False
    application_deadline: datetime | None = None

    @field_validator("title", mode="before")
    @classmethod
    def default_title(cls, value):
        return "" if value is None else value

    @field_validator("amount", mode="before")
    @classmethod
    def default_amount(cls, value):
        return 0 if value is None else value

    @field_validator("is_active", mode="before")
    @classmethod
    def default_is_active(cls, value):
        return False if value is None else value


class ApplicantProfile(BaseModel):
    """Subset of the applicant profile joined onto an application."""
    nationality: str | None = None
    country: str | None = None


class Application(RecordModel):
    """A candidacy for a scholarship."""
    id: str
    scholarship_id: str
    student_id: str | None = None
    # null status counts as none of accepted, rejected or pending
    status: str | None = None
    created_at: datetime
    reviewed_at: datetime | None = None
    profile: ApplicantProfile | None = Field(
        default=None,
        validation_alias=AliasChoices("profile", "profiles"),
    )


class AnalyticsEvent(RecordModel):
    """An entry of the append-only analytics event log."""
    id: str | None = None
    event_type: str
    user_id: str | None = None
    scholarship_id: str | None = None
    created_at: datetime
    event_data: dict[str, Any] = {}

    @field_validator("event_data", mode="before")
    @classmethod
    def default_event_data(cls, value):
        return {} if value is None else value


# ============================================================================
# ANALYTICS RESULT MODELS
# ============================================================================

class TimeBucket(BaseModel):
    """One calendar-day slot of a time series."""
    date: str  # YYYY-MM-DD
    label: str
    value: int


class ScholarshipPerformance(BaseModel):
    """Per-scholarship application and view counters."""
    scholarship_id: str
    title: str
    amount: float
    applications_count: int
    accepted_count: int
    rejected_count: int
    pending_count: int
    views_count: int
    conversion_rate: float
    success_rate: float


class Trend(BaseModel):
    """Signed change between the older and the recent half of the window."""
    value: float
    direction: Literal["up", "down", "stable"]
    percentage: float


class Trends(CamelModel):
    application_trend: Trend
    acceptance_rate_trend: Trend
    popularity_trend: Trend


class Predictions(CamelModel):
    next_week_applications: int
    next_month_applications: int
    confidence: Literal["low", "medium"]


class EngagementMetrics(CamelModel):
    total_views: int
    unique_viewers: int
    conversion_rate: float
    engagement_rate: float
    avg_time_to_apply: float  # days
    bounce_rate: float


class Insight(BaseModel):
    """A rule-triggered narrative fact."""
    type: str
    title: str
    description: str
    actionable: bool
    suggestion: str


class CountryCount(BaseModel):
    name: str
    value: int


class Overview(CamelModel):
    total_scholarships: int
    active_scholarships: int
    total_applications: int
    accepted_applications: int
    rejected_applications: int
    pending_applications: int
    success_rate: float
    total_funding: float
    avg_applications_per_scholarship: float


class TimeSeries(CamelModel):
    applications_by_day: list[TimeBucket]
    views_by_day: list[TimeBucket]


class Geographic(CamelModel):
    applications_by_country: list[CountryCount]


class AggregationResult(CamelModel):
    """Everything the institution dashboard needs, derived from the three record sets."""
    overview: Overview
    time_series: TimeSeries
    geographic: Geographic
    scholarship_performance: list[ScholarshipPerformance]
    trends: Trends
    predictions: Predictions
    engagement: EngagementMetrics
    insights: list[Insight]


# ============================================================================
# INSTITUTION ANALYTICS ENDPOINT MODELS
# ============================================================================

class InstitutionAnalyticsRequest(CamelModel):
    """Request model for institution analytics."""
    institution_id: str | None = None
    timeframe: str = "30d"


class DataPoints(BaseModel):
    scholarships: int
    applications: int
    events: int


class AnalyticsMetadata(CamelModel):
    institution_id: str
    timeframe: str
    generated_at: str
    data_points: DataPoints


class InstitutionAnalyticsResponse(BaseModel):
    """Response model for institution analytics."""
    success: bool
    data: AggregationResult
    metadata: AnalyticsMetadata


class AnalyticsSummaryResponse(CamelModel):
    """Response model for the narrative analytics summary."""
    success: bool
    summary: str
    insights_count: int
    generated_by: Literal["gemini", "rules"]


class ErrorDetail(BaseModel):
    code: str
    message: str


class ErrorResponse(BaseModel):
    """Uniform error envelope."""
    error: ErrorDetail


# ============================================================================
# RECOMMENDATION TRACKER MODELS
# ============================================================================

class TrackerRequest(CamelModel):
    """Request model for recommendation tracking."""
    action: str | None = None
    recommendation_id: str | None = None
    type: str | None = None
    user_id: str | None = None
    metadata: dict[str, Any] | None = None


class TrackerResponse(BaseModel):
    """Response model for recommendation tracking."""
    success: bool
    message: str


# ============================================================================
# DATA EXPORT MODELS
# ============================================================================

class ExportRequest(CamelModel):
    """Request model for institution data export."""
    institution_id: str | None = None
    data_type: str | None = None
    format: Literal["csv", "json"] = "csv"
