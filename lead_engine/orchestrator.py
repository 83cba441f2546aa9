"""
Enrichment Orchestrator
=======================
Runs each lead through the data sources in turn, then scores it:
  GitHub -> Hunter.io -> (LinkedIn + Founder extraction, gated on Hunter) -> Score

Source failures are logged and skipped; a lead is scored with whatever
was found. Batches run several leads at once, bounded by max_concurrent.
"""

import threading
import time
from typing import Any, Callable, Dict, List, Optional
from datetime import datetime
from concurrent.futures import ThreadPoolExecutor

from .config.settings import HUNTER_LOOKUP_COST_USD, MAX_CONCURRENT_LEADS
from .engine import LeadScorer
from .models.schemas import (
    BatchEnrichmentResult,
    EnrichedLead,
    EnrichmentResult,
    Lead,
    ProfileBundle,
)
from .observability.logging import get_logger
from .sources import FounderSource, GitHubSource, HunterSource, LinkedInSource

logger = get_logger(__name__)

ProgressCallback = Callable[[int, int, EnrichedLead], None]


def _new_stats() -> Dict[str, Any]:
    return {
        "total_processed": 0,
        "successful": 0,
        "github_found": 0,
        "hunter_found": 0,
        "linkedin_found": 0,
        "founder_found": 0,
        "source_failures": 0,
        "total_cost_usd": 0.0,
    }


class EnrichmentOrchestrator:
    """
    Sequential per-lead enrichment over pluggable data sources.
    """

    def __init__(
        self,
        scorer: Optional[LeadScorer] = None,
        github: Optional[GitHubSource] = None,
        hunter: Optional[HunterSource] = None,
        linkedin: Optional[LinkedInSource] = None,
        founder: Optional[FounderSource] = None,
        hunter_cost_usd: float = HUNTER_LOOKUP_COST_USD,
    ):
        """
        Args:
            scorer: Scoring engine (loads the default config if omitted)
            github: GitHub adapter
            hunter: Hunter.io adapter
            linkedin: LinkedIn crawler
            founder: AI founder-signal extractor
            hunter_cost_usd: Cost charged per Hunter.io lookup that returned data
        """
        self.scorer = scorer or LeadScorer()
        self.github = github
        self.hunter = hunter
        self.linkedin = linkedin
        self.founder = founder
        self.hunter_cost_usd = hunter_cost_usd

        self._stats_lock = threading.Lock()
        self.stats = _new_stats()

        if self.founder is None:
            logger.warning("No founder extractor configured - founder enrichment will be skipped")

    def enrich_lead(self, lead: Lead) -> EnrichmentResult:
        """
        Enrich and score a single lead.

        Args:
            lead: Lead to enrich

        Returns:
            EnrichmentResult; success means at least one source found data
        """
        logger.info("Enriching lead: %s", lead.email)
        cost_usd = 0.0
        bundle = ProfileBundle()

        # =====================================================================
        # 1. GitHub
        # =====================================================================
        if self.github is not None:
            bundle.github = self._call_source("github", self.github.enrich_by_email, lead.email)
            if bundle.github:
                logger.info(
                    "  GitHub: @%s (%d repos, %d stars)",
                    bundle.github.username,
                    bundle.github.public_repos,
                    bundle.github.total_stars,
                )

        # =====================================================================
        # 2. Hunter.io
        # =====================================================================
        if self.hunter is not None:
            bundle.hunter = self._call_source("hunter", self.hunter.verify_email, lead.email)
            if bundle.hunter:
                cost_usd += self.hunter_cost_usd
                logger.info(
                    "  Hunter.io: company=%s position=%s",
                    bundle.hunter.company,
                    bundle.hunter.position,
                )

        # =====================================================================
        # 3. LinkedIn + Founder extraction (only with Hunter data)
        # =====================================================================
        if bundle.hunter:
            if self.linkedin is not None and bundle.hunter.linkedin_url:
                bundle.linkedin = self._call_source(
                    "linkedin", self.linkedin.crawl_profile, bundle.hunter.linkedin_url
                )

            if self.founder is not None:
                person_name = self._person_name(lead, bundle)
                bundle.founder = self._call_source(
                    "founder",
                    self.founder.extract_founder_signals,
                    bundle.linkedin,
                    person_name,
                )
                if bundle.founder:
                    logger.info("  Founder signals extracted (confidence: %d%%)", bundle.founder.confidence)

        # =====================================================================
        # 4. Score
        # =====================================================================
        result = self.scorer.score(bundle)
        logger.info("  Score: %.1f/100 (%s) - %s", result.total, result.tier.value, result.reasoning)
        logger.info("  Cost: $%.4f", cost_usd)

        success = bundle.has_data()
        self._record(bundle, success, cost_usd)

        enriched = EnrichedLead(
            **lead.model_dump(include=set(Lead.model_fields)),
            enrichment=bundle,
            score=result,
            enriched_at=datetime.utcnow(),
            cost_usd=cost_usd,
        )
        return EnrichmentResult(success=success, lead=enriched, cost_usd=cost_usd)

    def enrich_leads(
        self,
        leads: List[Lead],
        max_concurrent: Optional[int] = None,
        on_progress: Optional[ProgressCallback] = None,
    ) -> BatchEnrichmentResult:
        """
        Enrich multiple leads, a bounded number at a time.

        Args:
            leads: Leads to enrich
            max_concurrent: Parallel pipelines (defaults to LEAD_ENGINE_MAX_CONCURRENT)
            on_progress: Called as (completed, total, enriched_lead) in input order;
                skipped for leads whose pipeline raised

        Returns:
            BatchEnrichmentResult with results in input order
        """
        start_time = time.time()
        workers = max(1, max_concurrent or MAX_CONCURRENT_LEADS)
        total = len(leads)
        logger.info("Starting batch enrichment: %d leads (concurrency %d)", total, workers)

        results: List[EnrichmentResult] = []
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [executor.submit(self.enrich_lead, lead) for lead in leads]
            for index, (lead, future) in enumerate(zip(leads, futures), start=1):
                try:
                    result = future.result()
                except Exception as e:
                    logger.exception("Enrichment failed for %s", lead.email)
                    result = EnrichmentResult(success=False, lead=None, error=str(e), cost_usd=0)
                results.append(result)
                if on_progress and result.lead is not None:
                    on_progress(index, total, result.lead)

        total_cost = sum(r.cost_usd for r in results)
        successful = sum(1 for r in results if r.success)
        avg_cost = total_cost / total if total else 0.0
        elapsed = (time.time() - start_time) * 1000

        logger.info("Batch enrichment complete: %d/%d successful", successful, total)
        logger.info("  Total cost: $%.4f (avg $%.4f per lead)", total_cost, avg_cost)

        return BatchEnrichmentResult(
            processed=total,
            successful=successful,
            failed=total - successful,
            total_cost_usd=round(total_cost, 4),
            avg_cost_usd=round(avg_cost, 4),
            processing_time_ms=round(elapsed, 2),
            results=results,
        )

    def get_stats(self) -> Dict[str, Any]:
        """Get enrichment statistics"""
        with self._stats_lock:
            stats = self.stats.copy()
        if stats["total_processed"] > 0:
            stats["success_rate"] = round(
                stats["successful"] / stats["total_processed"] * 100, 1
            )
            stats["avg_cost_usd"] = round(
                stats["total_cost_usd"] / stats["total_processed"], 4
            )
        return stats

    def reset_stats(self):
        with self._stats_lock:
            self.stats = _new_stats()

    # =========================================================================
    # Helper Methods
    # =========================================================================

    def _call_source(self, name: str, fetch: Callable, *args):
        """Run one adapter call; failures are logged and treated as no data"""
        try:
            found = fetch(*args)
        except Exception:
            logger.exception("  %s enrichment failed", name)
            with self._stats_lock:
                self.stats["source_failures"] += 1
            return None
        if found is None:
            logger.info("  %s: nothing found", name)
        return found

    def _person_name(self, lead: Lead, bundle: ProfileBundle) -> str:
        """Hunter's full name, else the lead's name, else the email local part"""
        if bundle.hunter and bundle.hunter.full_name:
            return bundle.hunter.full_name
        if lead.name:
            return lead.name
        return lead.email.split("@")[0]

    def _record(self, bundle: ProfileBundle, success: bool, cost_usd: float):
        with self._stats_lock:
            self.stats["total_processed"] += 1
            if success:
                self.stats["successful"] += 1
            for source in ("github", "hunter", "linkedin", "founder"):
                if getattr(bundle, source) is not None:
                    self.stats[f"{source}_found"] += 1
            self.stats["total_cost_usd"] += cost_usd
