"""Tests for the rule-based recommendation engine."""

from checkin.recommendations import (
    COLD_START,
    HIGH_MOOD,
    LOW_MOOD,
    MID_MOOD,
    NEGATIVE_SENTIMENT,
    _dedupe,
    recent_window,
    recommend,
)
from checkin.models import Recommendation


def _ids(recs):
    return [r.id for r in recs]


class TestRecommend:
    """Mood tiers, sentiment overlay, dedup."""

    def test_cold_start(self):
        recs = recommend([])
        assert _ids(recs) == ["r_default", "r_walk"]
        assert recs == list(COLD_START)

    def test_low_mood_without_overlay(self, make_entry):
        entries = [make_entry(mood=1, sentiment=0), make_entry(mood=2, sentiment=0)]
        assert recommend(entries) == list(LOW_MOOD)

    def test_high_mood_with_negative_sentiment(self, make_entry):
        entries = [make_entry(mood=4, sentiment=-0.5), make_entry(mood=5, sentiment=-0.5)]
        recs = recommend(entries)
        assert recs == list(HIGH_MOOD) + list(NEGATIVE_SENTIMENT)
        assert len(recs) == 3
        assert len({r.text for r in recs}) == 3

    def test_mid_mood(self, make_entry):
        entries = [make_entry(mood=3), make_entry(mood=3)]
        assert _ids(recommend(entries)) == ["r_breathe", "r_walk2"]

    def test_tier_boundaries(self, make_entry):
        # avg 2.5 is low tier, avg 3.5 is mid tier
        assert _ids(recommend([make_entry(mood=2), make_entry(mood=3)])) == ["r_ground", "r_talk"]
        assert _ids(recommend([make_entry(mood=3), make_entry(mood=4)])) == ["r_breathe", "r_walk2"]
        assert _ids(recommend([make_entry(mood=4)])) == ["r_keep"]

    def test_overlay_threshold_is_strict(self, make_entry):
        recs = recommend([make_entry(mood=5, sentiment=-0.1)])
        assert _ids(recs) == ["r_keep"]

    def test_overlay_combines_with_low_tier(self, make_entry):
        recs = recommend([make_entry(mood=1, sentiment=-0.4)])
        assert _ids(recs) == ["r_ground", "r_talk", "r_journal", "r_sleep"]

    def test_missing_and_out_of_range_mood_count_as_three(self, make_entry):
        entries = [make_entry(mood=None), make_entry(mood=9), make_entry(mood=0)]
        assert _ids(recommend(entries)) == ["r_breathe", "r_walk2"]

    def test_missing_sentiment_counts_as_zero(self, make_entry):
        recs = recommend([make_entry(mood=5, sentiment=None)])
        assert _ids(recs) == ["r_keep"]

    def test_does_not_truncate_window(self, make_entry):
        entries = [make_entry(mood=5) for _ in range(10)] + [make_entry(mood=1) for _ in range(10)]
        # avg over all 20 is 3.0
        assert _ids(recommend(entries)) == ["r_breathe", "r_walk2"]

    def test_pure(self, make_entry):
        entries = [make_entry(mood=2, sentiment=-0.3)]
        assert recommend(entries) == recommend(entries)


class TestDedupe:
    def test_keeps_first_occurrence(self):
        recs = [
            Recommendation("a", "same"),
            Recommendation("b", "other"),
            Recommendation("c", "same"),
        ]
        assert _ids(_dedupe(recs)) == ["a", "b"]


class TestRecentWindow:
    def test_newest_first_and_truncated(self, make_entry):
        entries = [make_entry(date=f"2024-01-{d:02d}") for d in range(1, 16)]
        window = recent_window(entries)
        assert len(window) == 10
        assert window[0].date == "2024-01-15"
        assert window[-1].date == "2024-01-06"

    def test_stable_for_same_date(self, make_entry):
        first = make_entry(date="2024-01-01")
        second = make_entry(date="2024-01-01")
        assert recent_window([first, second]) == [first, second]

    def test_custom_size(self, make_entry):
        entries = [make_entry() for _ in range(5)]
        assert len(recent_window(entries, size=3)) == 3
