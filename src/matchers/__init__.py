"""Rule-based detection of business mentions in free-form text."""
from src.matchers.matching_orchestrator import analyze, analyze_business_presence

__all__ = ["analyze", "analyze_business_presence"]
