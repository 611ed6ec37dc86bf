"""Tests for SearchTracker: recent queries and trending counts."""

import threading

from cardsearch.search.tracker import SearchTracker


class TestRecentQueries:
    def test_most_recent_first(self) -> None:
        tracker = SearchTracker()
        tracker.track("web")
        tracker.track("design")
        assert tracker.recent_queries() == ["design", "web"]

    def test_capped_to_max_recent(self) -> None:
        tracker = SearchTracker(max_recent=10)
        for i in range(12):
            tracker.track(f"q{i}")
        recent = tracker.recent_queries()
        assert len(recent) == 10
        assert recent[0] == "q11"
        assert recent[-1] == "q2"

    def test_keeps_raw_query(self) -> None:
        tracker = SearchTracker()
        tracker.track("  Web Designer! ")
        assert tracker.recent_queries() == ["  Web Designer! "]

    def test_returns_copy(self) -> None:
        tracker = SearchTracker()
        tracker.track("web")
        tracker.recent_queries().append("tampered")
        assert tracker.recent_queries() == ["web"]


class TestTrending:
    def test_sorted_by_count(self) -> None:
        tracker = SearchTracker()
        for query in ["a", "b", "b", "c", "c", "c"]:
            tracker.track(query)
        assert tracker.trending() == ["c", "b", "a"]

    def test_ties_keep_first_seen_order(self) -> None:
        tracker = SearchTracker()
        for query in ["a", "b", "b", "c"]:
            tracker.track(query)
        assert tracker.trending() == ["b", "a", "c"]

    def test_limit(self) -> None:
        tracker = SearchTracker()
        for i in range(8):
            tracker.track(f"q{i}")
        assert tracker.trending(limit=5) == ["q0", "q1", "q2", "q3", "q4"]

    def test_case_sensitive(self) -> None:
        tracker = SearchTracker()
        tracker.track("design")
        tracker.track("Design")
        assert tracker.counts()["design"] == 1
        assert tracker.counts()["Design"] == 1

    def test_empty(self) -> None:
        assert SearchTracker().trending() == []

    def test_counts_survive_recent_cap(self) -> None:
        tracker = SearchTracker(max_recent=2)
        for query in ["a", "b", "c", "a"]:
            tracker.track(query)
        assert tracker.recent_queries() == ["a", "c"]
        assert tracker.counts()["b"] == 1


class TestConcurrency:
    def test_no_lost_updates(self) -> None:
        tracker = SearchTracker()

        def worker() -> None:
            for _ in range(200):
                tracker.track("design")

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert tracker.counts()["design"] == 1600
        assert len(tracker.recent_queries()) == 10
