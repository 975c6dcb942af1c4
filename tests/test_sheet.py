import csv
from pathlib import Path

import pandas as pd

from script_automation.adapters.sheet import CsvWorkQueue
from script_automation.domain.models import ResultRow


def _write_csv(path: Path, rows: list) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=rows[0].keys())
        writer.writeheader()
        writer.writerows(rows)


def _submission(content="文章内容", count="2", words="300-500", status="", **extra):
    row = {
        "timestamp": "2024-05-01 09:00:00",
        "source_content": content,
        "script_count": count,
        "word_count": words,
        "status": status,
        "completed_at": "",
        "platform": "",
    }
    row.update(extra)
    return row


def test_items_are_keyed_by_sheet_row(tmp_path: Path) -> None:
    input_csv = tmp_path / "input.csv"
    _write_csv(input_csv, [
        _submission(),
        _submission(content="", status="Pending"),
        _submission(count="3.0", status="Completed (3 scripts)"),
        _submission(words="", platform="bilibili"),
    ])
    queue = CsvWorkQueue(input_csv, tmp_path / "results.csv")

    items = queue.items()
    assert [item.request_id for item in items] == [2, 3, 4, 5]
    assert items[0].request.script_count == 2
    assert items[1].request is None
    assert items[1].error == "Missing required fields"
    assert items[2].request.script_count == 3
    assert items[3].request.platform == "bilibili"
    assert [item.request_id for item in queue.pending()] == [2, 3, 5]
    assert queue.latest().request_id == 5


def test_bad_script_count_becomes_row_error(tmp_path: Path) -> None:
    input_csv = tmp_path / "input.csv"
    _write_csv(input_csv, [_submission(count="many"), _submission(count="0")])
    items = CsvWorkQueue(input_csv, tmp_path / "results.csv").items()
    assert items[0].error == "Invalid script count: many"
    assert "script_count" in items[1].error


def test_mark_updates_status_column(tmp_path: Path) -> None:
    input_csv = tmp_path / "input.csv"
    _write_csv(input_csv, [_submission(), _submission()])
    queue = CsvWorkQueue(input_csv, tmp_path / "results.csv")

    queue.mark(3, "Completed (2 scripts)", completed_at="2024-05-01 09:05:00")

    df = pd.read_csv(input_csv, dtype=str, keep_default_na=False)
    assert list(df["status"]) == ["", "Completed (2 scripts)"]
    assert df.loc[1, "completed_at"] == "2024-05-01 09:05:00"
    assert df.loc[0, "source_content"] == "文章内容"


def test_results_append_and_read_back(tmp_path: Path) -> None:
    queue = CsvWorkQueue(None, tmp_path / "out" / "results.csv")
    assert queue.results() == []

    queue.append_results([ResultRow(2, 1, "主题一", "内容, 带逗号\n和换行", 10, "t")])
    saved = queue.append_results([ResultRow(3, 1, "主题二", "内容二", 3, "t")])
    assert saved == 1
    assert queue.append_results([]) == 0

    rows = queue.results()
    assert [(r.request_id, r.theme) for r in rows] == [("2", "主题一"), ("3", "主题二")]
    assert rows[0].content == "内容, 带逗号\n和换行"
    assert rows[0].word_count == 10
