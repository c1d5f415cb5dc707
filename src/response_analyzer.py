import asyncio
from typing import Dict, List, Sequence
import numpy as np
from loguru import logger

from src.models import (
    AnalysisResult,
    ModelPerformance,
    PositionBucket,
    PresenceReport,
    ResponseAnalysis,
    ResponseRecord,
)
from src.matchers import analyze

# (label, lowest position, highest position) - inclusive
POSITION_RANGES = [
    ("0-50", 0, 50),
    ("51-150", 51, 150),
    ("151-300", 151, 300),
    ("301-500", 301, 500),
    ("500+", 501, None),
]


def count_words(text: str) -> int:
    """Count whitespace-separated words."""
    return len(text.split())


def _mention_density(match_count: int, word_count: int) -> float:
    """Matches per 100 words."""
    if match_count == 0 or word_count == 0:
        return 0.0
    return match_count / word_count * 100


def _model_performance(analyses: List[ResponseAnalysis]) -> List[ModelPerformance]:
    """Group match statistics by model name, in first-seen order."""
    grouped: Dict[str, List[ResponseAnalysis]] = {}
    for analysis in analyses:
        grouped.setdefault(analysis.model_name, []).append(analysis)

    performance = []
    for model_name, items in grouped.items():
        matches = [m for a in items for m in a.result.matches]
        positions = np.array([m.character_position for m in matches], dtype=float)
        confidences = np.array([m.confidence for m in matches], dtype=float)
        performance.append(ModelPerformance(
            model_name=model_name,
            match_count=len(matches),
            response_count=len(items),
            average_position=float(positions.mean()) if matches else 0.0,
            average_confidence=float(confidences.mean()) if matches else 0.0,
        ))
    return performance


def _position_distribution(positions: np.ndarray) -> List[PositionBucket]:
    """Bucket match start offsets into the fixed position ranges."""
    total = len(positions)
    buckets = []
    for label, low, high in POSITION_RANGES:
        in_range = positions >= low
        if high is not None:
            in_range &= positions <= high
        count = int(in_range.sum())
        buckets.append(PositionBucket(
            range=label,
            count=count,
            percentage=count / total * 100 if total else 0.0,
        ))
    return buckets


async def _analyze_one(business_name: str, response: ResponseRecord) -> ResponseAnalysis:
    result: AnalysisResult = await asyncio.to_thread(analyze, response.response_text, business_name)
    word_count = count_words(response.response_text)
    return ResponseAnalysis(
        response_id=response.response_id,
        model_name=response.model_name,
        result=result,
        word_count=word_count,
        mention_density=_mention_density(result.total_matches, word_count),
    )


async def analyze_responses(business_name: str, responses: Sequence[ResponseRecord]) -> PresenceReport:
    """
    Analyse several AI responses for the same business in parallel.

    Each response is checked independently on a worker thread; the per-response
    results are then rolled up into per-model statistics and a distribution of
    where in the responses the business tends to appear.

    Args:
        business_name (str): Business to look for.
        responses (Sequence[ResponseRecord]): AI answers to analyse.

    Returns:
        PresenceReport: Per-response analyses and the aggregated summary.
    """
    logger.debug(f"Analysing {len(responses)} response(s) for '{business_name}'")

    analyses = list(await asyncio.gather(*[_analyze_one(business_name, r) for r in responses]))

    all_matches = [m for a in analyses for m in a.result.matches]
    positions = np.array([m.character_position for m in all_matches], dtype=int)
    mentioned = sum(1 for a in analyses if a.result.mentioned)

    report = PresenceReport(
        business_name=business_name,
        total_responses=len(analyses),
        total_matches=len(all_matches),
        average_position=float(positions.mean()) if len(positions) else 0.0,
        mention_rate=mentioned / len(analyses) * 100 if analyses else 0.0,
        response_analyses=analyses,
        model_performance=_model_performance(analyses),
        position_distribution=_position_distribution(positions),
    )

    logger.debug(
        f"'{business_name}': {report.total_matches} match(es) across {report.total_responses} response(s), "
        f"average position {report.average_position:.1f}"
    )
    return report
