"""
Data Risk Scavenger - Scan Coordinator Tests

Tests for per-email fan-out passes and multi-email coordination, using an
in-memory HTTP client.
"""

import asyncio
import pytest
from unittest.mock import AsyncMock, patch

from scavenger.models.scan import PerEmailScanResult, RiskLevel, ScanStage, UserInput
from scavenger.services.scan import ScanCoordinator
from scavenger.utils.exceptions import (
    InvalidEmailError,
    MissingFieldError,
    ScanFailedError,
)


def jane(**kwargs):
    defaults = {
        "name": "Jane Doe",
        "primary_email": "jane@example.com",
        "location": "Paris",
    }
    defaults.update(kwargs)
    return UserInput(**defaults)


class TestRunPass:
    """Tests for a single email pass."""

    def test_all_adapters_called(self, coordinator, fake_http, make_hibp_breach):
        """Test every configured adapter is invoked for the email."""
        fake_http.add("breachedaccount", body=[make_hibp_breach("ExampleCo", ["Passwords"])])
        fake_http.add("emailrep.io", body={"email": "jane@example.com", "suspicious": False})
        fake_http.add("sherlock.test", body={"found": [{"site": "GitHub", "url": "https://github.com/jane"}]})
        fake_http.add("social-searcher", body={"posts": []})
        fake_http.add("serpapi.com", body={"organic_results": [
            {"position": 1, "title": "Jane", "link": "https://jane.test"},
        ]})

        result = asyncio.run(coordinator.run_pass("jane@example.com", jane()))

        assert [b.name for b in result.breaches] == ["ExampleCo"]
        assert result.reputation.suspicious == False
        assert result.presence.found[0].site == "GitHub"
        assert result.social.posts == []
        assert result.web_results[0].source_email == "jane@example.com"
        assert result.failed_sources == []
        assert len(fake_http.calls) == 5

    def test_username_defaults_to_local_part(self, coordinator, fake_http):
        """Test presence lookup uses the email local part without a username."""
        asyncio.run(coordinator.run_pass("jane.doe@example.com", jane()))
        assert fake_http.calls_to("sherlock.test")[0]["json"]["username"] == "jane.doe"

    def test_username_override(self, coordinator, fake_http):
        """Test a supplied username is used for presence lookup."""
        asyncio.run(coordinator.run_pass("jane@example.com", jane(username="jdoe42")))
        assert fake_http.calls_to("sherlock.test")[0]["json"]["username"] == "jdoe42"

    def test_breach_error_degrades(self, coordinator, fake_http):
        """Test a breach lookup error status becomes [] and is recorded."""
        fake_http.add("breachedaccount", status=500)

        result = asyncio.run(coordinator.run_pass("jane@example.com", jane()))

        assert result.breaches == []
        assert result.failed_sources == ["hibp"]

    def test_malformed_web_body_keeps_other_sources(self, coordinator, fake_http, make_hibp_breach):
        """Test a malformed search body leaves the pass and its breaches intact."""
        fake_http.add("breachedaccount", body=[make_hibp_breach("ExampleCo", ["Passwords"])])
        fake_http.add("serpapi.com", body={"organic_results": ["not-an-object"], "search_information": "n/a"})

        scan = asyncio.run(coordinator.scan(jane()))

        assert [b.name for b in scan.breaches] == ["ExampleCo"]
        assert scan.web_results == []
        assert scan.skipped_emails == []

        fake_http.routes.pop()
        fake_http.add("serpapi.com", body={"organic_results": "oops"})

        result = asyncio.run(coordinator.run_pass("jane@example.com", jane()))
        assert [b.name for b in result.breaches] == ["ExampleCo"]
        assert result.web_results == []

    def test_unconfigured_sources_are_absent(self, empty_credentials, fake_http, settings):
        """Test no credentials means no calls and an empty pass."""
        coordinator = ScanCoordinator(empty_credentials, fake_http, settings)

        result = asyncio.run(coordinator.run_pass("jane@example.com", jane()))

        assert fake_http.calls == []
        assert result == PerEmailScanResult(email="jane@example.com")

    def test_adapter_timeout(self, credentials, fake_http, settings_factory):
        """Test a slow adapter is cut off without stalling the others."""
        coordinator = ScanCoordinator(credentials, fake_http, settings_factory(adapter_timeout_seconds=0.05))
        fake_http.add("emailrep.io", body={"email": "jane@example.com", "suspicious": True}, delay=1.0)
        fake_http.add("serpapi.com", body={"organic_results": [{"position": 1, "link": "https://jane.test"}]})

        result = asyncio.run(coordinator.run_pass("jane@example.com", jane()))

        assert result.reputation is None
        assert len(result.web_results) == 1

    def test_guard_records_timeout(self, coordinator):
        """Test the per-adapter guard falls back to the empty value."""
        coordinator.adapter_timeout = 0.01
        failed = []

        async def slow():
            await asyncio.sleep(1)
            return ["never"]

        result = asyncio.run(coordinator._guarded("slow", slow(), [], failed))

        assert result == []
        assert failed == ["slow"]


class TestScan:
    """Tests for multi-email scans."""

    def test_passes_run_in_input_order(self, coordinator):
        """Test one pass per email, sequentially, in input order."""
        user_input = jane(additional_emails=["b@example.com", "", "c@example.com"])
        seen = []

        async def fake_pass(email, _input):
            seen.append(email)
            return PerEmailScanResult(email=email)

        with patch.object(coordinator, "run_pass", side_effect=fake_pass) as run_pass:
            scan = asyncio.run(coordinator.scan(user_input))

        assert run_pass.call_count == 3
        assert seen == ["jane@example.com", "b@example.com", "c@example.com"]
        assert scan.scanned_emails == seen

    def test_two_email_breach_merge(self, coordinator, fake_http, make_hibp_breach):
        """Test 2 breaches then 1 new + 1 duplicate merges to 3."""
        fake_http.add("breachedaccount/jane", body=[
            make_hibp_breach("Adobe", ["Passwords"]),
            make_hibp_breach("Canva", ["Email addresses"]),
        ])
        fake_http.add("breachedaccount/work", body=[
            make_hibp_breach("Dropbox", ["Email addresses"]),
            make_hibp_breach("Canva", ["Email addresses"]),
        ])

        scan = asyncio.run(coordinator.scan(jane(additional_emails=["work@example.com"])))

        assert len(scan.breaches) == 3
        assert {b.name for b in scan.breaches} == {"Adobe", "Canva", "Dropbox"}

    def test_failed_email_skipped(self, coordinator):
        """Test a failing pass is skipped and the rest continue."""
        async def flaky_pass(email, _input):
            if email == "bad@example.com":
                raise RuntimeError("unexpected")
            return PerEmailScanResult(email=email)

        with patch.object(coordinator, "run_pass", side_effect=flaky_pass):
            scan = asyncio.run(coordinator.scan(jane(additional_emails=["bad@example.com", "ok@example.com"])))

        assert scan.scanned_emails == ["jane@example.com", "ok@example.com"]
        assert scan.skipped_emails == ["bad@example.com"]

    def test_first_failure_then_success(self, coordinator):
        """Test the first successful pass seeds the aggregate."""
        async def flaky_pass(email, _input):
            if email == "jane@example.com":
                raise RuntimeError("unexpected")
            return PerEmailScanResult(email=email)

        with patch.object(coordinator, "run_pass", side_effect=flaky_pass):
            scan = asyncio.run(coordinator.scan(jane(additional_emails=["ok@example.com"])))

        assert scan.scanned_emails == ["ok@example.com"]
        assert scan.passes_merged == 1

    def test_all_emails_fail(self, coordinator):
        """Test a scan where every pass fails raises one error."""
        failing = AsyncMock(side_effect=RuntimeError("down"))

        with patch.object(coordinator, "run_pass", failing):
            with pytest.raises(ScanFailedError) as exc_info:
                asyncio.run(coordinator.scan(jane(additional_emails=["b@example.com"])))

        assert exc_info.value.failed_emails == ["jane@example.com", "b@example.com"]
        assert failing.call_count == 2

    def test_pass_timeout(self, credentials, fake_http, settings_factory):
        """Test a pass exceeding the pass timeout is skipped."""
        coordinator = ScanCoordinator(credentials, fake_http, settings_factory(pass_timeout_seconds=0.05))

        async def slow_pass(email, _input):
            if email == "slow@example.com":
                await asyncio.sleep(1)
            return PerEmailScanResult(email=email)

        with patch.object(coordinator, "run_pass", side_effect=slow_pass):
            scan = asyncio.run(coordinator.scan(jane(additional_emails=["slow@example.com"])))

        assert scan.skipped_emails == ["slow@example.com"]

    def test_validation(self, coordinator):
        """Test missing name and invalid emails are rejected before any pass."""
        with pytest.raises(MissingFieldError):
            asyncio.run(coordinator.scan(jane(name="  ")))
        with pytest.raises(MissingFieldError):
            asyncio.run(coordinator.scan(jane(primary_email="")))
        with pytest.raises(InvalidEmailError):
            asyncio.run(coordinator.scan(jane(additional_emails=["not-an-email"])))

    def test_progress_events(self, coordinator, fake_http, make_hibp_breach):
        """Test progress events carry email and breach counts."""
        fake_http.add("breachedaccount", body=[make_hibp_breach("Adobe")])
        events = []

        asyncio.run(coordinator.scan(jane(additional_emails=["b@example.com"]), progress=events.append))

        assert [e.stage for e in events] == [
            ScanStage.STARTED,
            ScanStage.PASS_STARTED,
            ScanStage.PASS_COMPLETED,
            ScanStage.PASS_STARTED,
            ScanStage.PASS_COMPLETED,
            ScanStage.COMPLETED,
        ]
        assert events[2].email == "jane@example.com"
        assert events[2].breach_count == 1
        assert events[-1].breach_count == 1

    def test_end_to_end_single_email(self, coordinator, fake_http, make_hibp_breach):
        """Test the single password breach example through the coordinator."""
        fake_http.add("breachedaccount", body=[
            make_hibp_breach("ExampleCo", ["Passwords", "Email addresses"], "2022-05-01", verified=True),
        ])

        scan = asyncio.run(coordinator.scan(jane()))

        assert scan.exposed_data_types == ["Passwords", "Email addresses"]
        assert scan.risk_level == RiskLevel.LOW
        assert (
            "Immediately change passwords on all accounts, starting with financial and email accounts"
            in scan.recommended_actions
        )


class TestProviderStatus:
    """Tests for source status reporting."""

    def test_status(self, coordinator, empty_credentials, fake_http, settings):
        """Test configured flags per adapter."""
        status = coordinator.get_provider_status()

        assert set(status) == {"hibp", "emailrep", "sherlock", "social_searcher", "serpapi"}
        assert all(entry["configured"] for entry in status.values())

        status = ScanCoordinator(empty_credentials, fake_http, settings).get_provider_status()
        assert not any(entry["configured"] for entry in status.values())
        assert status["hibp"]["status"] == "unconfigured"
