"""
Recommendation tracking: appends recommendation events to the analytics log.
"""
import logging
from datetime import datetime, timezone

logger = logging.getLogger(__name__)

# action -> (event type, success message)
TRACKER_ACTIONS = {
    "mark_viewed": ("recommendation_viewed", "Recommendation marked as viewed"),
    "track_interaction": ("recommendation_interaction", "Interaction recorded"),
    "record_feedback": ("recommendation_feedback", "Feedback recorded"),
}


def build_event_data(action: str, recommendation_id: str, rec_type: str,
                     metadata: dict | None, timestamp: str) -> dict:
    """Event payload for a tracker action."""
    metadata = metadata or {}
    event_data = {
        "recommendation_type": rec_type,
        "recommendation_id": recommendation_id,
        "timestamp": timestamp,
    }
    if action == "track_interaction":
        event_data["interaction_type"] = metadata.get("interactionType") or "click"
        event_data.update(metadata)
    elif action == "record_feedback":
        event_data["feedback_type"] = metadata.get("feedbackType") or "rating"
        event_data["feedback_value"] = metadata.get("feedbackValue")
        event_data["feedback_comment"] = metadata.get("comment")
    return event_data


def track_recommendation(supabase, action: str, recommendation_id: str, rec_type: str,
                         user_id: str | None = None, metadata: dict | None = None) -> str:
    """Record a tracker action and return its confirmation message.

    Raises ValueError for an unsupported action.
    """
    if action not in TRACKER_ACTIONS:
        raise ValueError(f"Unsupported action: {action}")

    event_type, message = TRACKER_ACTIONS[action]
    timestamp = datetime.now(timezone.utc).isoformat()
    is_scholarship = rec_type == "scholarship"

    if action == "mark_viewed" and is_scholarship:
        logger.debug(f"Flagging ml_recommendations row as viewed: scholarship={recommendation_id}, student={user_id}")
        (
            supabase.table("ml_recommendations")
            .update({"is_viewed": True, "viewed_at": timestamp})
            .eq("scholarship_id", recommendation_id)
            .eq("student_id", user_id)
            .execute()
        )

    supabase.table("analytics_events").insert({
        "event_type": event_type,
        "user_id": user_id,
        "scholarship_id": recommendation_id if is_scholarship else None,
        "event_data": build_event_data(action, recommendation_id, rec_type, metadata, timestamp),
    }).execute()

    logger.info(f"Tracked {event_type} for {rec_type} {recommendation_id}")
    return message
