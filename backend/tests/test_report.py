"""
Data Risk Scavenger - Report Tests

Tests for password heuristics, dark web summary, report building and
display formatting.
"""

from datetime import datetime, timezone

from scavenger.models.scan import AggregatedScan, PerEmailScanResult, RiskLevel, UserInput
from scavenger.models.sources import BreachRecord, WebSearchResult
from scavenger.services.aggregation import aggregate_pass
from scavenger.services.report import (
    assess_password,
    build_report,
    calculate_severity,
    format_for_display,
    summarize_dark_web,
)
from scavenger.utils.constants import PASSWORD_MANAGER_SUGGESTION, PASSWORD_GOOD_COMPLEXITY_MESSAGE


def create_breach(name, data_classes=None, breach_date="2020-01-01", domain=None, verified=True, spam=False):
    return BreachRecord(
        name=name,
        title=name,
        domain=domain if domain is not None else f"{name.lower()}.com",
        breach_date=breach_date,
        data_classes=data_classes or ["Email addresses"],
        is_verified=verified,
        is_spam_list=spam,
        description=f"{name} breach",
    )


class TestPasswordSecurity:
    """Tests for password heuristics."""

    def test_strong_password(self):
        """Test a long mixed password scores 5 with the good-complexity message."""
        result = assess_password("Correct-Horse-9-Battery")

        assert result.strength == 5
        assert result.is_common == False
        assert result.suggestions == [PASSWORD_GOOD_COMPLEXITY_MESSAGE, PASSWORD_MANAGER_SUGGESTION]

    def test_weak_common_password(self):
        """Test a short common password."""
        result = assess_password("password")

        # only length >= 8
        assert result.strength == 1
        assert result.is_common == True
        assert "Add uppercase letters" in result.suggestions
        assert "Add numbers" in result.suggestions
        assert PASSWORD_GOOD_COMPLEXITY_MESSAGE not in result.suggestions
        assert result.suggestions[-1] == PASSWORD_MANAGER_SUGGESTION

    def test_strength_points(self):
        """Test each check adds one point."""
        assert assess_password("abc").strength == 0
        assert assess_password("Abc").strength == 1
        assert assess_password("Abc1").strength == 2
        assert assess_password("Abc1!").strength == 3
        assert assess_password("Abc1!xyz").strength == 4
        assert assess_password("Abc1!xyzxyzx").strength == 5

    def test_compromised_from_breaches(self):
        """Test compromised follows password exposure in any breach."""
        assert assess_password("x", [create_breach("A", ["Passwords"])]).compromised == True
        assert assess_password("x", [create_breach("A", ["Usernames"])]).compromised == False
        assert assess_password("x").compromised == False


class TestDarkWebFindings:
    """Tests for the dark web summary."""

    def test_mentions_exclude_unverified_and_spam(self):
        """Test only verified, non-spam breaches are counted."""
        breaches = [
            create_breach("A", ["Passwords"]),
            create_breach("B", verified=False),
            create_breach("C", ["Phone numbers"], spam=True),
        ]

        findings = summarize_dark_web(breaches)

        assert findings.mentions == 1
        assert findings.exposed_info == ["Passwords"]

    def test_sources_grouped_by_domain(self):
        """Test grouping with count and most recent date."""
        breaches = [
            create_breach("A1", breach_date="2019-02-01", domain="shop.test"),
            create_breach("A2", breach_date="2021-09-15", domain="shop.test"),
            create_breach("B", breach_date="", domain="forum.test"),
        ]

        sources = {s.name: s for s in summarize_dark_web(breaches).sources}

        assert sources["shop.test"].count == 2
        assert sources["shop.test"].last_seen == "2021-09-15"
        assert sources["forum.test"].count == 1
        assert sources["forum.test"].last_seen is None


class TestBuildReport:
    """Tests for report construction."""

    def _scan(self):
        return aggregate_pass(PerEmailScanResult(
            email="jane@example.com",
            breaches=[create_breach("ExampleCo", ["Passwords", "Email addresses"], "2022-05-01")],
            web_results=[WebSearchResult(position=1, link="https://jane.test", title="Jane")],
            web_total_results=42,
        ))

    def test_report_fields(self):
        """Test identity fields and aggregate are combined."""
        user_input = UserInput(
            name="Jane Doe",
            primary_email="jane@example.com",
            additional_emails=["work@example.com", ""],
            location="Paris",
        )
        scan_date = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)

        report = build_report(self._scan(), user_input, scan_date=scan_date)

        assert report.name == "Jane Doe"
        assert report.email == "jane@example.com"
        assert report.additional_emails == ["work@example.com"]
        assert report.location == "Paris"
        assert report.scan_date == "2024-03-01T12:00:00+00:00"
        assert report.breach_count == 1
        assert report.risk_level == RiskLevel.LOW
        assert report.password_security is None
        assert report.dark_web_findings.mentions == 1
        assert report.web_presence.total_results == 42

    def test_report_names_scanned_addresses(self):
        """Test surrounding whitespace is dropped from reported emails."""
        user_input = UserInput(
            name="Jane Doe",
            primary_email="  jane@example.com ",
            additional_emails=[" work@example.com", "   "],
        )

        report = build_report(self._scan(), user_input)

        assert report.email == "jane@example.com"
        assert report.additional_emails == ["work@example.com"]

    def test_password_section_only_when_supplied(self):
        """Test password security is present iff a password was given."""
        user_input = UserInput(name="Jane Doe", primary_email="jane@example.com", password="hunter2")

        report = build_report(self._scan(), user_input)

        assert report.password_security is not None
        assert report.password_security.compromised == True
        assert "hunter2" not in report.model_dump_json()

    def test_empty_scan(self):
        """Test a scan with nothing found."""
        user_input = UserInput(name="Jane Doe", primary_email="jane@example.com")

        report = build_report(AggregatedScan(scanned_emails=["jane@example.com"]), user_input)

        assert report.breach_count == 0
        assert report.web_presence is None
        assert report.dark_web_findings.mentions == 0


class TestFormatter:
    """Tests for display formatting."""

    def test_calculate_severity(self):
        """Test severity thresholds."""
        assert calculate_severity(70) == 'high'
        assert calculate_severity(69) == 'medium'
        assert calculate_severity(40) == 'medium'
        assert calculate_severity(39) == 'low'
        assert calculate_severity(0) == 'low'

    def test_format_for_display(self):
        """Test summary, breach rows and Yes/No flags."""
        user_input = UserInput(name="Jane Doe", primary_email="jane@example.com", password="password")
        scan = aggregate_pass(PerEmailScanResult(
            email="jane@example.com",
            breaches=[
                create_breach("ExampleCo", ["Passwords", "Email addresses"], "2022-05-01"),
                create_breach("Undated", breach_date="", domain="undated.test"),
            ],
        ))
        report = build_report(scan, user_input, scan_date=datetime(2024, 3, 1, tzinfo=timezone.utc))

        display = format_for_display(report)

        assert display['summary']['scanDate'] == '2024-03-01'
        assert display['summary']['riskLevel'] == 'low'
        assert display['breaches'][0] == {
            'name': 'ExampleCo',
            'domain': 'exampleco.com',
            'date': '2022-05-01',
            'dataExposed': 'Passwords, Email addresses',
            'description': 'ExampleCo breach',
        }
        assert display['passwordInfo']['isCommon'] == 'Yes'
        assert display['passwordInfo']['compromised'] == 'Yes'
        last_seen = {s['name']: s['lastSeen'] for s in display['darkWebInfo']['sources']}
        assert last_seen == {'exampleco.com': '2022-05-01', 'undated.test': 'Unknown'}

    def test_no_password_info(self):
        """Test passwordInfo is None without a password."""
        user_input = UserInput(name="Jane Doe", primary_email="jane@example.com")
        report = build_report(AggregatedScan(), user_input)

        assert format_for_display(report)['passwordInfo'] is None
