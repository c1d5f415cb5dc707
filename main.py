import os
import asyncio
import pandas as pd
import csv
from typing import List
import sys
from loguru import logger

from src.models import AnalysisResult, MatchType, ResponseRecord
from src.matchers import analyze
from src.config import INPUT_CSV, OUTPUT_CSV, BATCH_SIZE, LOG_LEVEL

REQUIRED_COLUMNS = ("business_name", "response_text")

OUTPUT_HEADER = [
    "business_name", "response_id", "model_name", "mentioned", "total_matches",
    "average_confidence", "highest_confidence", "first_position", "exact", "fuzzy", "partial",
]


def load_responses_from_csv(file_path: str, nrows: int = None) -> List[tuple]:
    """Load (business_name, ResponseRecord) pairs from CSV."""
    df = pd.read_csv(file_path, nrows=nrows)
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"{file_path} is missing required column(s): {', '.join(missing)}")

    rows = []
    for idx, row in df.iterrows():
        # Helper to safely extract values from pandas Series, converting NaN to ""
        def safe_get(col):
            if col not in row.index or pd.isna(row[col]):
                return ""
            return str(row[col])

        record = ResponseRecord(
            response_id=safe_get("response_id") or str(idx),
            model_name=safe_get("model_name"),
            response_text=safe_get("response_text"),
            query=safe_get("query"),
        )
        rows.append((safe_get("business_name"), record))
    return rows


def batch_iter(rows: List[tuple], batch_size: int):
    """
    Yield index and row slices of size `batch_size` for batched processing.
    """
    n = len(rows)
    for i in range(0, n, batch_size):
        yield i, rows[i:i+batch_size]


async def process_row(business_name: str, record: ResponseRecord) -> AnalysisResult:
    """
    Analyse a single response on a worker thread.

    Args:
        business_name (str): Business to look for.
        record (ResponseRecord): AI response to analyse.

    Returns:
        AnalysisResult: Presence analysis for this response.
    """
    result = await asyncio.to_thread(analyze, record.response_text, business_name)
    logger.debug(
        f"{record.response_id} [{record.model_name or '-'}] '{business_name}': "
        f"{result.total_matches} match(es), avg confidence {result.average_confidence}"
    )
    return result


def result_row(record: ResponseRecord, result: AnalysisResult) -> list:
    best = result.highest_confidence_match
    return [
        result.business_name,
        record.response_id,
        record.model_name,
        result.mentioned,
        result.total_matches,
        result.average_confidence,
        best.confidence if best else 0,
        result.matches[0].character_position if result.matches else -1,
        result.match_type_counts[MatchType.EXACT],
        result.match_type_counts[MatchType.FUZZY],
        result.match_type_counts[MatchType.PARTIAL],
    ]


async def main():
    """
    Orchestrate the batch presence analysis.

    - Loads input CSV of AI responses.
    - Analyses each batch concurrently.
    - Writes results incrementally to an output CSV.
    """
    # Initialize logs
    logger.remove()  # Remove default handler
    logger.add(sys.stderr, level=LOG_LEVEL, format="<green>{time:HH:mm:ss}</green> | <level>{message}</level>")

    all_rows = load_responses_from_csv(INPUT_CSV)

    # Initialize output file
    output_path = OUTPUT_CSV
    if os.path.exists(output_path):
        os.remove(output_path)
    with open(output_path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(OUTPUT_HEADER)

    mentioned = 0
    for start_idx, batch_rows in batch_iter(all_rows, BATCH_SIZE):
        logger.info(f"Processing rows {start_idx}..{start_idx + len(batch_rows) - 1}")

        results = await asyncio.gather(*[process_row(name, record) for name, record in batch_rows])

        with open(output_path, "a", newline="") as f:
            writer = csv.writer(f)
            for (_, record), result in zip(batch_rows, results):
                writer.writerow(result_row(record, result))
                mentioned += int(result.mentioned)

    logger.info(f"Done: business mentioned in {mentioned} of {len(all_rows)} response(s); wrote {output_path}")


if __name__ == "__main__":
    asyncio.run(main())
