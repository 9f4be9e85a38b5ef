"""Arrow schemas for persisted evaluation results."""

from __future__ import annotations

import pyarrow as pa

EVALUATION_SCHEMA_VERSION = 1

EPISODE_SCHEMA = pa.schema(
    [
        ("schema_version", pa.int64()),
        ("game_index", pa.int64()),
        ("seed", pa.uint64()),
        ("policy", pa.string()),
        ("final_score", pa.int64()),
        ("turns", pa.int64()),
        ("start_row", pa.int64()),
        ("start_col", pa.int64()),
        ("elapsed_ms", pa.float64()),
    ]
)
