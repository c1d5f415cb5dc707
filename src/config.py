# src/config.py
from dotenv import load_dotenv
import os

load_dotenv()

# Confidence calibration
EXACT_CONFIDENCE = 100
FUZZY_THRESHOLD = 70
PARTIAL_THRESHOLD = 60
PARTIAL_MAX_CONFIDENCE = 95

# Characters of surrounding text kept on each side of a match
CONTEXT_WINDOW = 20

# Input guard: texts longer than this are truncated (0 disables the guard)
MAX_TEXT_LENGTH = int(os.getenv("MAX_TEXT_LENGTH", "200000"))

# Runtime parameters
BATCH_SIZE = int(os.getenv("BATCH_SIZE", "15"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# File names
INPUT_CSV = os.getenv("INPUT_CSV", "responses.csv")
OUTPUT_CSV = os.getenv("OUTPUT_CSV", "presence_results.csv")
