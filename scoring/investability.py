"""
Investability score -- how ready a company is to be shown to investors.

Four categories, 100 points in total:
    kyc_verified      -- 30 points
    financials_linked -- 20 points
    documents         -- 25 points (full at 3+ uploaded documents)
    revenue           -- 25 points (linear up to $1M)

compute_score() returns the total plus the reasons points were awarded;
compute_breakdown() returns the same categories one by one for the dashboard.

Both are pure: they take a CompanySnapshot and touch no storage.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional, Union

KYC_POINTS = 30
FINANCIALS_POINTS = 20
DOCUMENTS_POINTS = 25
REVENUE_POINTS = 25

DOCUMENTS_REQUIRED = 3
REVENUE_CAP = 1_000_000

MAX_SCORE = 100

# Per-document rate of the first breakdown endpoint (25 / 3, truncated)
_LEGACY_POINTS_PER_DOC = 8.33

Number = Union[int, float]


@dataclass(frozen=True)
class CompanySnapshot:
    """Read-only view of a company at scoring time."""
    kyc_verified: bool = False
    financials_linked: bool = False
    document_count: int = 0
    revenue: float = 0


@dataclass
class ScoreResult:
    score: int
    reasons: list[str] = field(default_factory=list)


@dataclass
class CategoryBreakdown:
    status: bool
    points: Number
    max_points: int
    description: str
    current: Optional[Number] = None
    required: Optional[int] = None
    max_value: Optional[Number] = None


@dataclass
class Breakdown:
    kyc_verified: CategoryBreakdown
    financials_linked: CategoryBreakdown
    documents: CategoryBreakdown
    revenue: CategoryBreakdown

    @property
    def total_points(self) -> Number:
        return (
            self.kyc_verified.points
            + self.financials_linked.points
            + self.documents.points
            + self.revenue.points
        )


# ---------------------------------------------------------------------------
# helpers
# ---------------------------------------------------------------------------

def _document_points(count: int) -> int:
    if count >= DOCUMENTS_REQUIRED:
        return DOCUMENTS_POINTS
    if count > 0:
        return math.floor((count / DOCUMENTS_REQUIRED) * DOCUMENTS_POINTS)
    return 0


def _revenue_scale(revenue: float) -> float:
    return min(revenue / REVENUE_CAP, 1)


def _revenue_points(revenue: float) -> int:
    return math.floor(_revenue_scale(revenue) * REVENUE_POINTS)


def format_amount(value: float) -> str:
    """Thousands-separated amount: 1500000 -> '1,500,000', 1234.5 -> '1,234.5'."""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.3f}".rstrip("0").rstrip(".")


# ---------------------------------------------------------------------------
# public API
# ---------------------------------------------------------------------------

def compute_score(company: CompanySnapshot) -> ScoreResult:
    """Score a company 0-100; reasons follow the order categories are checked."""
    score = 0
    reasons: list[str] = []

    if company.kyc_verified:
        score += KYC_POINTS
        reasons.append("KYC verified")

    if company.financials_linked:
        score += FINANCIALS_POINTS
        reasons.append("Financials linked")

    docs = company.document_count
    if docs >= DOCUMENTS_REQUIRED:
        score += _document_points(docs)
        reasons.append(f"{docs} docs uploaded")
    elif docs > 0:
        score += _document_points(docs)
        reasons.append(f"{docs} docs uploaded (need {DOCUMENTS_REQUIRED}+ for full points)")

    revenue_points = _revenue_points(company.revenue)
    if revenue_points > 0:
        score += revenue_points
        reasons.append(f"Revenue scaled to ${format_amount(company.revenue)}")

    return ScoreResult(score=min(score, MAX_SCORE), reasons=reasons)


def compute_breakdown(company: CompanySnapshot, legacy: bool = False) -> Breakdown:
    """
    Per-category view of the score.

    By default every category carries exactly the points compute_score()
    awards for it. With legacy=True documents earn a flat 8.33 per document
    and revenue points are left unrounded, as the first dashboard did.
    """
    docs = company.document_count

    if legacy:
        doc_points: Number = min(docs, DOCUMENTS_REQUIRED) * _LEGACY_POINTS_PER_DOC
        revenue_points: Number = _revenue_scale(company.revenue) * REVENUE_POINTS
    else:
        doc_points = _document_points(docs)
        revenue_points = _revenue_points(company.revenue)

    return Breakdown(
        kyc_verified=CategoryBreakdown(
            status=company.kyc_verified,
            points=KYC_POINTS if company.kyc_verified else 0,
            max_points=KYC_POINTS,
            description="Complete KYC verification",
        ),
        financials_linked=CategoryBreakdown(
            status=company.financials_linked,
            points=FINANCIALS_POINTS if company.financials_linked else 0,
            max_points=FINANCIALS_POINTS,
            description="Link your financial accounts",
        ),
        documents=CategoryBreakdown(
            status=docs >= DOCUMENTS_REQUIRED,
            points=doc_points,
            max_points=DOCUMENTS_POINTS,
            description=f"Upload at least {DOCUMENTS_REQUIRED} documents",
            current=docs,
            required=DOCUMENTS_REQUIRED,
        ),
        revenue=CategoryBreakdown(
            status=company.revenue > 0,
            points=revenue_points,
            max_points=REVENUE_POINTS,
            description="Revenue scaling (up to $1M)",
            current=company.revenue,
            max_value=REVENUE_CAP,
        ),
    )
