"""
Progress Analyzer

Aggregates classified chat messages and journal entries into a
wellness trend for the dashboard.

ARCHITECTURE: Stateless. Every call recomputes from the full entry
list; there is no incremental update contract.
"""

from collections import Counter
from datetime import timezone
from typing import Sequence

from sahara.domain.enums.sentiment import ProgressTrend, SentimentCategory
from sahara.domain.models.progress import ProgressAnalysis, ProgressEntry, WeeklyScore
from sahara.services.sentiment.classifier import round_half_up


EMPTY_HISTORY_INSIGHT = "Start journaling to track your progress!"


def _timeline_key(entry: ProgressEntry) -> float:
    """POSIX timestamp of an entry; naive dates are taken as UTC."""
    date = entry.date
    if date.tzinfo is None:
        date = date.replace(tzinfo=timezone.utc)
    return date.timestamp()


class ProgressAnalyzer:
    """
    Trend analysis over progress entries.

    Trend compares the average wellness of the earliest and latest
    windows of the date-sorted history.

    Usage:
        analyzer = ProgressAnalyzer()
        analysis = analyzer.analyze(entries)
    """

    # Maximum entries in each comparison window
    TREND_WINDOW: int = 5

    # Average wellness change needed to call a trend
    TREND_THRESHOLD: float = 5.0

    # Entries per weekly bucket (sorted order, not calendar weeks)
    BUCKET_SIZE: int = 7

    # Average wellness above which the "good overall" insight fires
    GOOD_WELLNESS_THRESHOLD: int = 70

    TREND_INSIGHTS: dict[ProgressTrend, str] = {
        ProgressTrend.IMPROVING: "Your wellness is trending upward! Keep it up.",
        ProgressTrend.DECLINING: "Your wellness has dipped recently. Consider reaching out for support.",
    }

    CATEGORY_INSIGHTS: dict[SentimentCategory, str] = {
        SentimentCategory.ANXIETY: "Anxiety appears frequently. Try breathing exercises.",
        SentimentCategory.STRESS: "Stress is common in your entries. Remember to take breaks.",
    }

    GOOD_WELLNESS_INSIGHT = "You're maintaining good mental wellness overall!"

    def analyze(self, entries: Sequence[ProgressEntry]) -> ProgressAnalysis:
        """
        Analyze a history of classified entries.

        Args:
            entries: Entries in any order, possibly empty

        Returns:
            ProgressAnalysis (a fixed onboarding default when empty)
        """
        if not entries:
            return ProgressAnalysis(insights=(EMPTY_HISTORY_INSIGHT,))

        ordered = sorted(entries, key=_timeline_key)
        wellness = [entry.sentiment.wellness_score for entry in ordered]

        average_wellness = round_half_up(sum(wellness) / len(wellness))
        trend = self._calculate_trend(wellness)
        dominant = self._dominant_category(ordered)

        return ProgressAnalysis(
            trend=trend,
            average_wellness=average_wellness,
            dominant_category=dominant,
            weekly_scores=self._weekly_scores(wellness),
            recent_mood=ordered[-1].sentiment.category,
            insights=self._insights(trend, dominant, average_wellness),
        )

    def _calculate_trend(self, wellness: list[int]) -> ProgressTrend:
        """Compare the earliest and latest windows of wellness scores."""
        window = min(self.TREND_WINDOW, len(wellness) // 2)
        if window == 0:
            return ProgressTrend.STABLE

        early = sum(wellness[:window]) / window
        late = sum(wellness[-window:]) / window

        if late - early > self.TREND_THRESHOLD:
            return ProgressTrend.IMPROVING
        if early - late > self.TREND_THRESHOLD:
            return ProgressTrend.DECLINING
        return ProgressTrend.STABLE

    def _dominant_category(self, ordered: Sequence[ProgressEntry]) -> SentimentCategory:
        """Most frequent category; ties go to the earliest occurrence."""
        counts = Counter(entry.sentiment.category for entry in ordered)
        # most_common orders equal counts by first insertion
        return counts.most_common(1)[0][0]

    def _weekly_scores(self, wellness: list[int]) -> tuple[WeeklyScore, ...]:
        """Average wellness per consecutive bucket of seven entries."""
        buckets = []
        for index, start in enumerate(range(0, len(wellness), self.BUCKET_SIZE), start=1):
            bucket = wellness[start:start + self.BUCKET_SIZE]
            buckets.append(WeeklyScore(
                week=f"Week {index}",
                score=round_half_up(sum(bucket) / len(bucket)),
            ))
        return tuple(buckets)

    def _insights(
        self,
        trend: ProgressTrend,
        dominant: SentimentCategory,
        average_wellness: int,
    ) -> tuple[str, ...]:
        """Apply the insight rules in order; every match is kept."""
        insights = []
        if trend in self.TREND_INSIGHTS:
            insights.append(self.TREND_INSIGHTS[trend])
        if dominant in self.CATEGORY_INSIGHTS:
            insights.append(self.CATEGORY_INSIGHTS[dominant])
        if average_wellness > self.GOOD_WELLNESS_THRESHOLD:
            insights.append(self.GOOD_WELLNESS_INSIGHT)
        return tuple(insights)


_default_analyzer = ProgressAnalyzer()


def analyze_progress(entries: Sequence[ProgressEntry]) -> ProgressAnalysis:
    """Analyze entries with the shared stateless analyzer."""
    return _default_analyzer.analyze(entries)
