"""
Services package initialization.
"""
from .aggregation import calculate_institution_analytics
from .record_store import fetch_institution_records
from .tracker import track_recommendation
from .export import export_institution_data
from .summary import summarize_analytics

__all__ = [
    "calculate_institution_analytics",
    "fetch_institution_records",
    "track_recommendation",
    "export_institution_data",
    "summarize_analytics",
]
