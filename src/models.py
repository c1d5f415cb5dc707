"""
Typed data models for the business presence pipeline.
All data structures used throughout the codebase should be defined here.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class MatchType(str, Enum):
    """How a business mention was detected."""
    EXACT = "exact"
    FUZZY = "fuzzy"
    PARTIAL = "partial"


@dataclass(frozen=True)
class BusinessMatch:
    """A single detected reference to a business name inside a text."""
    matched_text: str
    line_number: int  # 1-based
    character_position: int  # 0-based offset of the match start
    confidence: int  # 0-100
    match_type: MatchType
    context_before: str = ""
    context_after: str = ""

    @property
    def end_position(self) -> int:
        return self.character_position + len(self.matched_text)


@dataclass(frozen=True, eq=True, unsafe_hash=False)
class AnalysisResult:
    """Outcome of analysing one text against one business name."""
    business_name: str
    matches: Tuple[BusinessMatch, ...] = ()
    total_matches: int = 0
    highest_confidence_match: Optional[BusinessMatch] = None
    average_confidence: int = 0
    match_type_counts: Dict[MatchType, int] = field(
        default_factory=lambda: {t: 0 for t in MatchType}
    )

    # Holds a dict, so value equality only
    __hash__ = None

    @property
    def mentioned(self) -> bool:
        return self.total_matches > 0


@dataclass
class ResponseRecord:
    """An AI-provider answer to analyse for a business."""
    response_id: str
    model_name: str
    response_text: str
    query: str = ""


@dataclass
class ResponseAnalysis:
    """Per-response outcome within a multi-response report."""
    response_id: str
    model_name: str
    result: AnalysisResult
    word_count: int
    mention_density: float  # matches per 100 words


@dataclass
class ModelPerformance:
    """Aggregated match statistics for one AI model."""
    model_name: str
    match_count: int
    response_count: int
    average_position: float
    average_confidence: float


@dataclass
class PositionBucket:
    """Number of matches whose start offset falls inside a range."""
    range: str
    count: int
    percentage: float


@dataclass
class PresenceReport:
    """Business presence across several AI responses."""
    business_name: str
    total_responses: int
    total_matches: int
    average_position: float
    mention_rate: float  # percent of responses with at least one match
    response_analyses: List[ResponseAnalysis] = field(default_factory=list)
    model_performance: List[ModelPerformance] = field(default_factory=list)
    position_distribution: List[PositionBucket] = field(default_factory=list)
