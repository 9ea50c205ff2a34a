"""
Tests for engagement metrics.
"""
import pytest

from institution_analytics.services.engagement import (
    calculate_average_time_to_apply,
    calculate_engagement_metrics,
)

from conftest import days_ago, make_application, make_view


class TestEngagementMetrics:
    """Tests for view and conversion rates."""

    def test_empty_inputs_are_zero(self):
        metrics = calculate_engagement_metrics([], [])

        assert metrics.total_views == 0
        assert metrics.unique_viewers == 0
        assert metrics.conversion_rate == 0
        assert metrics.engagement_rate == 0
        assert metrics.bounce_rate == 0
        assert metrics.avg_time_to_apply == 0

    def test_rates(self):
        views = [
            make_view(user_id="u1"),
            make_view(user_id="u1"),
            make_view(user_id="u1"),
            make_view(user_id="u2"),
        ]
        applications = [make_application(id="a1", student_id="u9")]

        metrics = calculate_engagement_metrics(views, applications)

        assert metrics.total_views == 4
        assert metrics.unique_viewers == 2
        assert metrics.conversion_rate == pytest.approx(25)
        assert metrics.engagement_rate == pytest.approx(50)
        assert metrics.bounce_rate == pytest.approx(50)

    def test_applications_without_views(self):
        metrics = calculate_engagement_metrics([], [make_application()])

        assert metrics.conversion_rate == 0
        assert metrics.engagement_rate == 0

    def test_other_events_ignored(self):
        event = make_view().model_copy(update={"event_type": "recommendation_interaction"})
        metrics = calculate_engagement_metrics([event], [])

        assert metrics.total_views == 0


class TestAverageTimeToApply:
    """Tests for the view-to-application delay."""

    def test_uses_most_recent_earlier_view(self):
        views = [
            make_view(user_id="u1", scholarship_id="s1", created_at=days_ago(5)),
            make_view(user_id="u1", scholarship_id="s1", created_at=days_ago(2)),
        ]
        applications = [make_application(student_id="u1", scholarship_id="s1", created_at=days_ago(0))]

        assert calculate_average_time_to_apply(views, applications) == pytest.approx(2)

    def test_later_views_ignored(self):
        views = [
            make_view(user_id="u1", scholarship_id="s1", created_at=days_ago(3)),
            make_view(user_id="u1", scholarship_id="s1", created_at=days_ago(0.5)),
        ]
        applications = [make_application(student_id="u1", scholarship_id="s1", created_at=days_ago(1))]

        assert calculate_average_time_to_apply(views, applications) == pytest.approx(2)

    def test_applications_without_prior_view_excluded(self):
        views = [make_view(user_id="u1", scholarship_id="s1", created_at=days_ago(4))]
        applications = [
            make_application(id="a1", student_id="u1", scholarship_id="s1", created_at=days_ago(1)),
            make_application(id="a2", student_id="u2", scholarship_id="s1", created_at=days_ago(1)),
            make_application(id="a3", student_id="u1", scholarship_id="s2", created_at=days_ago(1)),
        ]

        assert calculate_average_time_to_apply(views, applications) == pytest.approx(3)

    def test_fractional_days(self):
        views = [make_view(user_id="u1", scholarship_id="s1", created_at=days_ago(1.5))]
        applications = [make_application(student_id="u1", scholarship_id="s1", created_at=days_ago(1))]

        assert calculate_average_time_to_apply(views, applications) == pytest.approx(0.5)

    def test_no_matches(self):
        assert calculate_average_time_to_apply([], [make_application()]) == 0
