"""
Data Risk Scavenger Scan Coordinator

Runs one adapter fan-out pass per email, sequentially, and folds the
passes into a single AggregatedScan.
"""

import logging
import asyncio
from typing import Any, Awaitable, Callable, Dict, List, Optional, TypeVar

from scavenger.config import Settings, get_settings
from scavenger.models.scan import (
    AggregatedScan,
    PerEmailScanResult,
    ScanProgress,
    ScanStage,
    UserInput,
)
from scavenger.utils.exceptions import (
    SourceError,
    EmailPassError,
    ScanFailedError,
)
from scavenger.utils.helpers import email_local_part
from scavenger.utils.validators import validate_required, validate_email, validate_email_list
from scavenger.services.aggregation import aggregate_pass
from scavenger.services.sources import (
    AiohttpClient,
    CredentialStore,
    HTTPClient,
    HIBPAdapter,
    EmailRepAdapter,
    SherlockAdapter,
    SocialSearcherAdapter,
    SerpAPIAdapter,
)
from .merge import merge_scans

logger = logging.getLogger(__name__)

T = TypeVar("T")
ProgressCallback = Callable[[ScanProgress], None]


class ScanCoordinator:
    """
    Coordinates multi-email exposure scans.

    Within a pass all adapters run concurrently and each is bounded by the
    adapter timeout. Passes run one email at a time to keep outbound load on
    rate-limited services flat, and each pass is bounded by the pass timeout.

    Features:
    - Graceful degradation: a failed adapter contributes its empty value
    - A failed email is skipped; only a scan where every email fails raises
    - Progress events for observability
    """

    def __init__(
        self,
        credentials: Optional[CredentialStore] = None,
        http_client: Optional[HTTPClient] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.credentials = credentials or CredentialStore.from_settings(self.settings)
        self.adapter_timeout = self.settings.adapter_timeout_seconds
        self.pass_timeout = self.settings.pass_timeout_seconds

        http = http_client or AiohttpClient(default_timeout=self.adapter_timeout)

        self.hibp = HIBPAdapter(self.credentials, http, self.adapter_timeout)
        self.emailrep = EmailRepAdapter(self.credentials, http, self.adapter_timeout)
        self.sherlock = SherlockAdapter(
            self.credentials, http, self.adapter_timeout,
            base_url=self.settings.sherlock_api_url,
        )
        self.social_searcher = SocialSearcherAdapter(
            self.credentials, http, self.adapter_timeout,
            limit=self.settings.social_search_limit,
        )
        self.serpapi = SerpAPIAdapter(
            self.credentials, http, self.adapter_timeout,
            max_results=self.settings.max_web_results,
        )

    @property
    def adapters(self) -> List[Any]:
        return [self.hibp, self.emailrep, self.sherlock, self.social_searcher, self.serpapi]

    async def _guarded(
        self,
        source: str,
        call: Awaitable[T],
        empty: T,
        failed_sources: List[str],
    ) -> T:
        """Await one adapter call; on timeout or source error fall back to its empty value."""
        try:
            return await asyncio.wait_for(call, timeout=self.adapter_timeout)
        except asyncio.TimeoutError:
            logger.warning(f"{source} timed out after {self.adapter_timeout}s")
            failed_sources.append(source)
        except SourceError as e:
            logger.warning(f"{source} failed: {e.message}")
            failed_sources.append(source)
        return empty

    async def run_pass(self, email: str, user_input: UserInput) -> PerEmailScanResult:
        """
        Run every adapter for one email concurrently.

        Args:
            email: Address for this pass
            user_input: Identity fields shared by all passes

        Returns:
            PerEmailScanResult with adapter outputs (empty where unavailable)

        Raises:
            EmailPassError: an adapter raised something other than a source error
        """
        failed_sources: List[str] = []
        username = user_input.username or email_local_part(email)

        results = await asyncio.gather(
            self._guarded("hibp", self.hibp.fetch_breaches(email), [], failed_sources),
            self._guarded("emailrep", self.emailrep.fetch_reputation(email), None, failed_sources),
            self._guarded("sherlock", self.sherlock.fetch_presence(username), None, failed_sources),
            self._guarded(
                "social_searcher",
                self.social_searcher.fetch_mentions(email, user_input.name),
                None,
                failed_sources,
            ),
            self._guarded(
                "serpapi",
                self.serpapi.search(user_input.name, email, user_input.location),
                None,
                failed_sources,
            ),
            return_exceptions=True,
        )

        for result in results:
            if isinstance(result, Exception):
                raise EmailPassError(f"Pass for {email} failed: {result}", email=email) from result

        breaches, reputation, presence, social, web = results

        return PerEmailScanResult(
            email=email,
            breaches=breaches,
            reputation=reputation,
            presence=presence,
            social=social,
            web_results=web.results if web else [],
            web_total_results=web.total_results if web else 0,
            failed_sources=failed_sources,
        )

    def _emit(self, progress: Optional[ProgressCallback], event: ScanProgress) -> None:
        logger.debug(f"Scan progress: {event.stage.value} {event.email or ''}")
        if progress is not None:
            progress(event)

    async def scan(
        self,
        user_input: UserInput,
        progress: Optional[ProgressCallback] = None,
    ) -> AggregatedScan:
        """
        Scan every email in the input and merge the passes.

        Args:
            user_input: Name, emails and optional location/username
            progress: Optional callback receiving ScanProgress events

        Returns:
            AggregatedScan over all emails that completed

        Raises:
            ValidationError: name missing or an email is invalid
            ScanFailedError: every email pass failed
        """
        validate_required(user_input.name, "name")
        emails = [validate_email(user_input.primary_email, "primary_email")]
        emails += validate_email_list(user_input.additional_emails, "additional_emails")

        total = len(emails)
        logger.info(f"Starting scan for {total} email(s)")
        self._emit(progress, ScanProgress(stage=ScanStage.STARTED, total=total))

        accumulator: Optional[AggregatedScan] = None
        skipped: List[str] = []

        for index, email in enumerate(emails):
            self._emit(progress, ScanProgress(
                stage=ScanStage.PASS_STARTED, total=total, index=index, email=email,
            ))

            try:
                result = await asyncio.wait_for(
                    self.run_pass(email, user_input),
                    timeout=self.pass_timeout,
                )
                pass_scan = aggregate_pass(result)
            except asyncio.TimeoutError:
                message = f"Pass timed out after {self.pass_timeout}s"
                logger.error(f"Skipping {email}: {message}")
                skipped.append(email)
                self._emit(progress, ScanProgress(
                    stage=ScanStage.PASS_FAILED, total=total, index=index, email=email, message=message,
                ))
                continue
            except Exception as e:
                logger.error(f"Skipping {email}: {e}", exc_info=True)
                skipped.append(email)
                self._emit(progress, ScanProgress(
                    stage=ScanStage.PASS_FAILED, total=total, index=index, email=email, message=str(e),
                ))
                continue

            accumulator = pass_scan if accumulator is None else merge_scans(accumulator, pass_scan)

            logger.info(
                f"Pass {index + 1}/{total} for {email}: {len(result.breaches)} breaches, "
                f"{len(result.web_results)} web results"
            )
            self._emit(progress, ScanProgress(
                stage=ScanStage.PASS_COMPLETED,
                total=total,
                index=index,
                email=email,
                breach_count=len(result.breaches),
                web_result_count=len(result.web_results),
            ))

        if accumulator is None:
            raise ScanFailedError(
                f"All {total} email scans failed",
                failed_emails=skipped,
            )

        if skipped:
            accumulator = accumulator.model_copy(update={"skipped_emails": skipped})

        logger.info(
            f"Scan complete: {len(accumulator.breaches)} unique breaches across "
            f"{accumulator.passes_merged} email(s), risk {accumulator.risk_level.value}"
        )
        self._emit(progress, ScanProgress(
            stage=ScanStage.COMPLETED,
            total=total,
            breach_count=len(accumulator.breaches),
            web_result_count=len(accumulator.web_results),
        ))
        return accumulator

    def get_provider_status(self) -> Dict[str, Dict[str, Any]]:
        """Get status of all source adapters."""
        return {
            adapter.provider_name: {
                'name': adapter.provider_name,
                'configured': adapter.is_configured,
                'requires_key': adapter.requires_api_key,
                **adapter.status.to_dict(),
            }
            for adapter in self.adapters
        }


# Singleton instance
_coordinator: Optional[ScanCoordinator] = None


def get_scan_coordinator() -> ScanCoordinator:
    """Get the scan coordinator singleton."""
    global _coordinator
    if _coordinator is None:
        _coordinator = ScanCoordinator()
    return _coordinator


def configure_scan_coordinator(
    credentials: Optional[CredentialStore] = None,
    http_client: Optional[HTTPClient] = None,
    settings: Optional[Settings] = None,
) -> ScanCoordinator:
    """Configure and get the scan coordinator."""
    global _coordinator
    _coordinator = ScanCoordinator(credentials=credentials, http_client=http_client, settings=settings)
    return _coordinator
