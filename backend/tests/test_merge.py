"""
Data Risk Scavenger - Scan Merge Tests

Tests for the pass merge reducer.
"""

from scavenger.models.scan import AggregatedScan, PerEmailScanResult, RiskLevel
from scavenger.models.sources import BreachRecord, WebSearchResult
from scavenger.services.aggregation import aggregate_pass
from scavenger.services.scan import (
    average_risk_score,
    merge_breaches,
    merge_scans,
    merge_web_results,
)


def create_breach(name, data_classes=None):
    return BreachRecord(name=name, title=name, breach_date="2021-06-01", data_classes=data_classes or ["Email addresses"])


def create_web_result(position, link, email):
    return WebSearchResult(position=position, link=link, title=link, source_email=email)


def create_scan(email, score=0, level=RiskLevel.LOW, breaches=None, actions=None, web=None):
    """Create a single-pass aggregate with default values."""
    return AggregatedScan(
        breaches=breaches or [],
        total_risk_score=score,
        risk_level=level,
        exposed_data_types=[dc for b in (breaches or []) for dc in b.data_classes],
        recommended_actions=actions or [],
        web_results=web or [],
        scanned_emails=[email],
    )


class TestMergeBreaches:
    """Tests for breach union."""

    def test_duplicate_name_kept_once(self):
        """Test a breach name present in both passes appears once."""
        first = [create_breach("Adobe", ["Passwords"])]
        second = [create_breach("Adobe", ["Usernames"]), create_breach("LinkedIn")]

        merged = merge_breaches(first, second)

        assert [b.name for b in merged] == ["Adobe", "LinkedIn"]
        assert merged[0].data_classes == ["Passwords"]

    def test_two_email_example(self):
        """Test 2 breaches plus 1 new and 1 duplicate gives 3."""
        first = aggregate_pass(PerEmailScanResult(
            email="a@example.com",
            breaches=[create_breach("Adobe"), create_breach("Canva")],
        ))
        second = aggregate_pass(PerEmailScanResult(
            email="b@example.com",
            breaches=[create_breach("Dropbox"), create_breach("Canva")],
        ))

        merged = merge_scans(first, second)

        assert len(merged.breaches) == 3
        assert merged.stats.breach_count == 3
        assert merged.scanned_emails == ["a@example.com", "b@example.com"]


class TestMergeWebResults:
    """Tests for web result merging."""

    def test_dedupe_and_order(self):
        """Test dedupe by link and ordering by original rank."""
        first = [
            create_web_result(1, "https://a.test", "a@example.com"),
            create_web_result(2, "https://shared.test", "a@example.com"),
            create_web_result(3, "https://c.test", "a@example.com"),
        ]
        second = [
            create_web_result(1, "https://shared.test", "b@example.com"),
            create_web_result(2, "https://d.test", "b@example.com"),
        ]

        merged = merge_web_results(first, second)

        assert [r.link for r in merged] == [
            "https://a.test",
            "https://shared.test",
            "https://d.test",
            "https://c.test",
        ]
        assert [r.position for r in merged] == [1, 1, 2, 3]
        # the earlier-ranked copy of the shared link wins
        assert merged[1].source_email == "b@example.com"


class TestMergeScans:
    """Tests for the full reducer."""

    def test_risk_level_never_downgrades(self):
        """Test merging a lower level keeps the higher one."""
        high = create_scan("a@example.com", level=RiskLevel.HIGH)
        low = create_scan("b@example.com", level=RiskLevel.LOW)

        assert merge_scans(high, low).risk_level == RiskLevel.HIGH
        assert merge_scans(low, high).risk_level == RiskLevel.HIGH

        medium = create_scan("c@example.com", level=RiskLevel.MEDIUM)
        assert merge_scans(merge_scans(low, medium), low).risk_level == RiskLevel.MEDIUM

    def test_running_average(self):
        """Test round((S * i + T) / (i + 1)) with half-up rounding."""
        assert average_risk_score(40, 1, 61) == 51
        assert average_risk_score(51, 2, 10) == 37

        merged = merge_scans(create_scan("a@example.com", score=40), create_scan("b@example.com", score=61))
        assert merged.total_risk_score == 51

        merged = merge_scans(merged, create_scan("c@example.com", score=10))
        assert merged.total_risk_score == 37
        assert merged.passes_merged == 3

    def test_actions_and_types_union(self):
        """Test set-union in first-seen order."""
        first = create_scan(
            "a@example.com",
            breaches=[create_breach("A", ["Passwords", "Email addresses"])],
            actions=["one", "two"],
        )
        second = create_scan(
            "b@example.com",
            breaches=[create_breach("B", ["email addresses", "Phone numbers"])],
            actions=["two", "three"],
        )

        merged = merge_scans(first, second)

        assert merged.exposed_data_types == ["Passwords", "Email addresses", "Phone numbers"]
        assert merged.recommended_actions == ["one", "two", "three"]

    def test_idempotent_for_identical_pass(self):
        """Test merging the same pass twice leaves the sets unchanged."""
        single = aggregate_pass(PerEmailScanResult(
            email="jane@example.com",
            breaches=[create_breach("ExampleCo", ["Passwords", "Email addresses"])],
            web_results=[create_web_result(1, "https://a.test", "jane@example.com")],
        ))

        merged = merge_scans(single, single)

        assert merged.breaches == single.breaches
        assert merged.exposed_data_types == single.exposed_data_types
        assert merged.recommended_actions == single.recommended_actions
        assert merged.web_results == single.web_results
        assert merged.total_risk_score == single.total_risk_score
        assert merged.risk_level == single.risk_level

    def test_inputs_not_mutated(self):
        """Test the reducer returns a new aggregate."""
        first = create_scan("a@example.com", breaches=[create_breach("A")])
        second = create_scan("b@example.com", breaches=[create_breach("B")])

        merge_scans(first, second)

        assert [b.name for b in first.breaches] == ["A"]
        assert first.scanned_emails == ["a@example.com"]
