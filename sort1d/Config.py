from pathlib import Path

SAMPLE_SEED = 0
SAMPLE_CNT = 2000
MAX_SAMPLE_TIME_MS = 5000

DEFAULT_NS = list(range(1, 10)) + list(range(10, 100, 10)) + list(range(100, 1000, 100)) + list(range(1000, 10001, 1000))
RESULT_PATH = Path("logs/statistics.csv")
