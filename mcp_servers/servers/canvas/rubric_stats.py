"""
Rubric score statistics.

Pure calculations over raw submission dicts carrying ``rubric_assessment``
(criterion id -> {"points": n, ...}). Only scores are read, never who
earned them.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


def median(numbers: List[float]) -> float:
    if not numbers:
        return 0
    ordered = sorted(numbers)
    middle = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return round((ordered[middle - 1] + ordered[middle]) / 2, 2)
    return round(ordered[middle], 2)


def average(numbers: List[float]) -> float:
    if not numbers:
        return 0
    return round(sum(numbers) / len(numbers), 2)


@dataclass
class ScoreSummary:
    count: int = 0
    average: float = 0
    median: float = 0
    minimum: float = 0
    maximum: float = 0

    @classmethod
    def of(cls, scores: List[float]) -> "ScoreSummary":
        if not scores:
            return cls()
        return cls(
            count=len(scores),
            average=average(scores),
            median=median(scores),
            minimum=min(scores),
            maximum=max(scores),
        )


@dataclass
class CriterionStats:
    id: str
    description: str
    points_possible: Optional[float]
    scores: ScoreSummary
    distribution: Dict[float, int] = field(default_factory=dict)


@dataclass
class RubricStats:
    total_submissions: int
    overall: ScoreSummary
    criteria: List[CriterionStats]


def _criterion_points(submission: Dict[str, Any], criterion_id: str) -> Optional[float]:
    assessment = submission.get("rubric_assessment") or {}
    entry = assessment.get(criterion_id)
    if not isinstance(entry, dict):
        return None
    return entry.get("points")


def compute_rubric_stats(criteria: List[Dict[str, Any]], submissions: List[Dict[str, Any]]) -> RubricStats:
    """Per-criterion and overall statistics for one assignment's rubric."""
    criterion_stats = []
    for criterion in criteria:
        criterion_id = str(criterion.get("id"))
        scores = [
            points
            for points in (_criterion_points(s, criterion_id) for s in submissions)
            if points is not None
        ]
        criterion_stats.append(
            CriterionStats(
                id=criterion_id,
                description=criterion.get("description") or criterion_id,
                points_possible=criterion.get("points"),
                scores=ScoreSummary.of(scores),
                distribution=dict(Counter(scores)),
            )
        )

    totals = [
        sum((entry or {}).get("points") or 0 for entry in s["rubric_assessment"].values())
        for s in submissions
        if s.get("rubric_assessment")
    ]

    return RubricStats(
        total_submissions=len(submissions),
        overall=ScoreSummary.of(totals),
        criteria=criterion_stats,
    )
