"""
IWorkQueue adapter backed by two CSV files (the Input and Results sheets).

Request ids are spreadsheet row numbers: the header is row 1, so the first
submission is request 2.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional

import pandas as pd

from script_automation.domain.errors import InvalidRequest
from script_automation.domain.models import GenerationRequest, ResultRow, WorkItem
from script_automation.ports.interfaces import IWorkQueue

logger = logging.getLogger(__name__)

INPUT_COLUMNS = ["timestamp", "source_content", "script_count", "word_count", "status", "completed_at"]
OPTIONAL_COLUMNS = ["style", "platform", "recipient"]
RESULT_COLUMNS = ["request_id", "script_number", "theme", "content", "word_count", "timestamp"]

FIRST_DATA_ROW = 2


def _read_csv(path: Path, columns: List[str]) -> pd.DataFrame:
    if not path.exists():
        return pd.DataFrame(columns=columns)
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    for column in columns:
        if column not in df.columns:
            df[column] = ""
    return df


def _row_to_item(request_id: int, row: pd.Series) -> WorkItem:
    source = str(row.get("source_content", "")).strip()
    count_raw = str(row.get("script_count", "")).strip()
    word_count = str(row.get("word_count", "")).strip()
    style = str(row.get("style", "")).strip() or None
    platform = str(row.get("platform", "")).strip() or None

    item = WorkItem(
        request_id=request_id,
        request=None,
        status=str(row.get("status", "")).strip(),
        timestamp=str(row.get("timestamp", "")).strip(),
        recipient=str(row.get("recipient", "")).strip() or None,
    )
    if not source or not count_raw or not (word_count or platform):
        item.error = "Missing required fields"
        return item
    try:
        script_count = int(float(count_raw))
    except ValueError:
        item.error = f"Invalid script count: {count_raw}"
        return item
    try:
        item.request = GenerationRequest(
            source_content=source,
            script_count=script_count,
            word_count_range=word_count,
            style=style,
            platform=platform,
        )
    except InvalidRequest as e:
        item.error = str(e)
    return item


class CsvWorkQueue(IWorkQueue):
    """Input CSV = submissions with a status column; results CSV = one row per script."""

    def __init__(self, input_path, results_path):
        self.input_path = Path(input_path) if input_path else None
        self.results_path = Path(results_path)

    def items(self) -> List[WorkItem]:
        if self.input_path is None:
            return []
        df = _read_csv(self.input_path, INPUT_COLUMNS + OPTIONAL_COLUMNS)
        return [_row_to_item(FIRST_DATA_ROW + i, row) for i, (_, row) in enumerate(df.iterrows())]

    def mark(self, request_id, status: str, completed_at: Optional[str] = None) -> None:
        if self.input_path is None:
            raise KeyError(f"No input sheet configured for row {request_id}")
        df = _read_csv(self.input_path, INPUT_COLUMNS)
        index = int(request_id) - FIRST_DATA_ROW
        if not 0 <= index < len(df):
            raise KeyError(f"No submission at row {request_id}")
        df.loc[df.index[index], "status"] = status
        if completed_at is not None:
            df.loc[df.index[index], "completed_at"] = completed_at
        df.to_csv(self.input_path, index=False)

    def append_results(self, rows: Iterable[ResultRow]) -> int:
        records = [
            {
                "request_id": row.request_id,
                "script_number": row.script_number,
                "theme": row.theme,
                "content": row.content,
                "word_count": row.word_count,
                "timestamp": row.timestamp,
            }
            for row in rows
        ]
        if not records:
            return 0
        self.results_path.parent.mkdir(parents=True, exist_ok=True)
        write_header = not self.results_path.exists()
        pd.DataFrame(records, columns=RESULT_COLUMNS).to_csv(
            self.results_path, mode="a", header=write_header, index=False
        )
        logger.debug("Appended %d result rows to %s", len(records), self.results_path)
        return len(records)

    def results(self) -> List[ResultRow]:
        df = _read_csv(self.results_path, RESULT_COLUMNS)
        rows = []
        for _, row in df.iterrows():
            rows.append(ResultRow(
                request_id=row["request_id"],
                script_number=int(float(row["script_number"] or 0)),
                theme=row["theme"],
                content=row["content"],
                word_count=int(float(row["word_count"] or 0)),
                timestamp=row["timestamp"],
            ))
        return rows
