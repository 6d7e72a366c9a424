# scoring -- investability scoring for onboarding companies
#
# Modules:
#   investability -- pure score + per-category breakdown (KYC, financials, documents, revenue)

from .investability import (
    Breakdown,
    CategoryBreakdown,
    CompanySnapshot,
    ScoreResult,
    compute_breakdown,
    compute_score,
)

__all__ = [
    "Breakdown",
    "CategoryBreakdown",
    "CompanySnapshot",
    "ScoreResult",
    "compute_breakdown",
    "compute_score",
]
