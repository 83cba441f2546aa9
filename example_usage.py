"""
Lead Scoring Engine - Usage Examples
====================================
Scoring a profile bundle directly, tuning the configuration, and running
a batch through the enrichment orchestrator with in-memory sources.
"""

from dotenv import load_dotenv

load_dotenv()


# =============================================================================
# EXAMPLE 1: Direct Scoring
# =============================================================================

def example_direct_scoring():
    """Score a bundle the adapters have already produced"""
    from lead_engine import LeadScorer
    from lead_engine.models.schemas import FounderSignals, GitHubProfile, ProfileBundle

    scorer = LeadScorer()

    bundle = ProfileBundle(
        github=GitHubProfile.model_validate({
            "username": "octo",
            "publicRepos": 12,
            "totalStars": 600,
            "topLanguages": ["TypeScript", "Go", "Rust"],
            "contributions": {"total": 3000, "lastYear": 1200},
            "openSourceContributions": 150,
        }),
        founder=FounderSignals.model_validate({
            "companiesFounded": [{"name": "Acme", "role": "CEO"}],
            "fundingRaised": [{"company": "Acme", "round": "Seed"}],
        }),
    )

    result = scorer.score(bundle)

    print(f"Score: {result.total}/100")
    print(f"Tier: {result.tier.value}")
    print(f"Reasoning: {result.reasoning}")

    print("\n--- Breakdown ---")
    print(f"  Ambition:     {result.breakdown.ambition:.1f}")
    print(f"  Intelligence: {result.breakdown.intelligence:.1f}")
    print(f"  Kindness:     {result.breakdown.kindness:.1f}")
    print(f"  Track record: {result.breakdown.track_record:.1f}")

    print("\n--- Signals ---")
    for name, value in sorted(result.signals.items()):
        print(f"  {name}: {value:.1f}")


# =============================================================================
# EXAMPLE 2: Custom Configuration
# =============================================================================

def example_custom_config():
    """Point the engine at your own scoring.yaml and reload while tuning"""
    import tempfile
    from pathlib import Path

    import yaml

    from lead_engine import LeadScorer
    from lead_engine.models.schemas import GitHubProfile, ProfileBundle

    document = {
        "version": "tuning-1",
        "ambition": {"github_projects": 20},
        "tiers": {"exceptional": 60, "strong": 40, "good": 20, "average": 10},
    }

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "scoring.yaml"
        path.write_text(yaml.safe_dump(document))

        scorer = LeadScorer(str(path))
        bundle = ProfileBundle(github=GitHubProfile(username="octo", public_repos=8))
        print(f"Before: {scorer.score(bundle).total} ({scorer.score(bundle).tier.value})")

        document["ambition"]["github_projects"] = 5
        path.write_text(yaml.safe_dump(document))
        scorer.reload_config()
        print(f"After:  {scorer.score(bundle).total} ({scorer.score(bundle).tier.value})")


# =============================================================================
# EXAMPLE 3: Batch Enrichment
# =============================================================================

class DemoGitHub:
    def enrich_by_email(self, email):
        from lead_engine.models.schemas import GitHubProfile

        if email.endswith("@startup.io"):
            return GitHubProfile(username=email.split("@")[0], public_repos=7, total_stars=120)
        return None


class DemoHunter:
    def verify_email(self, email):
        from lead_engine.models.schemas import HunterProfile

        return HunterProfile(email=email, first_name="Sam", last_name="Rivera", company="Startup")


class DemoFounder:
    def extract_founder_signals(self, linkedin, person_name):
        from lead_engine.models.schemas import FounderSignals

        return FounderSignals.model_validate({
            "companiesFounded": [{"name": "Startup"}],
            "mentorship": {"isMentor": True},
            "dataSources": ["web_search"],
        })


def example_batch_enrichment():
    """Enrich several leads concurrently"""
    from lead_engine.models.schemas import Lead
    from lead_engine.orchestrator import EnrichmentOrchestrator

    orchestrator = EnrichmentOrchestrator(
        github=DemoGitHub(),
        hunter=DemoHunter(),
        founder=DemoFounder(),
    )

    leads = [
        Lead(email="sam@startup.io", source="waitlist"),
        Lead(email="pat@bigcorp.com", name="Pat"),
        Lead(email="lee@startup.io"),
    ]

    def progress(done, total, lead):
        print(f"  [{done}/{total}] {lead.email}: {lead.score.total}")

    batch = orchestrator.enrich_leads(leads, max_concurrent=2, on_progress=progress)

    print(f"\nProcessed: {batch.processed}")
    print(f"Successful: {batch.successful}")
    print(f"Total cost: ${batch.total_cost_usd:.2f}")
    print(f"Stats: {orchestrator.get_stats()}")


if __name__ == "__main__":
    print("=" * 60)
    print("LEAD SCORING ENGINE - EXAMPLES")
    print("=" * 60 + "\n")

    print("\n[Example 1: Direct Scoring]")
    example_direct_scoring()

    print("\n" + "-" * 60)
    print("\n[Example 2: Custom Configuration]")
    example_custom_config()

    print("\n" + "-" * 60)
    print("\n[Example 3: Batch Enrichment]")
    example_batch_enrichment()

    print("\n" + "=" * 60)
    print("EXAMPLES COMPLETE")
    print("=" * 60)
