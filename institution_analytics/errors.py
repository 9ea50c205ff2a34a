"""
Service errors rendered as the uniform `{"error": {"code", "message"}}` envelope.
"""

INSTITUTION_ANALYTICS_ERROR = "INSTITUTION_ANALYTICS_ERROR"
RECOMMENDATION_TRACKER_ERROR = "RECOMMENDATION_TRACKER_ERROR"
DATA_EXPORT_ERROR = "DATA_EXPORT_ERROR"
INTERNAL_ERROR = "INTERNAL_ERROR"


class ServiceError(Exception):
    """An error a handler reports to its caller with a stable code."""

    def __init__(self, code: str, message: str, status_code: int = 500):
        super().__init__(message)
        self.code = code
        self.message = message
        self.status_code = status_code

    def to_dict(self) -> dict:
        return {"error": {"code": self.code, "message": self.message}}
