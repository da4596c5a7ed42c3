from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest

from adaptive_fec.infrastructure.trace_files import TraceFormatError, load_stats_trace, parse_timestamp


def test_load_csv_trace(tmp_path) -> None:
    path = tmp_path / "trace.csv"
    path.write_text(
        "rtt_ms,loss_rate,jitter_ms,current_bitrate,target_bitrate,timestamp\n"
        "200,0.10,5,1000,1050,100\n"
        "180,0.00,,,,\n",
        encoding="utf-8",
    )

    samples = load_stats_trace(path)

    assert len(samples) == 2
    assert samples[0].rtt_ms == 200
    assert samples[0].jitter_ms == 5
    assert samples[0].current_bitrate == 1000.0
    assert samples[0].target_bitrate == 1050.0
    assert samples[0].timestamp == datetime.fromtimestamp(100, tz=timezone.utc)
    assert samples[1].current_bitrate == 0.0
    assert samples[1].timestamp is None


def test_load_json_trace(tmp_path) -> None:
    path = tmp_path / "trace.json"
    path.write_text(
        json.dumps([{"rtt_ms": 60, "loss_rate": 0.04, "timestamp": "2024-05-01T12:00:00"}]),
        encoding="utf-8",
    )

    [sample] = load_stats_trace(path)

    assert sample.loss_rate == 0.04
    assert sample.timestamp == datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def test_load_jsonl_trace_skips_blank_lines(tmp_path) -> None:
    path = tmp_path / "trace.jsonl"
    path.write_text('{"rtt_ms": 60, "loss_rate": 0.0}\n\n{"rtt_ms": 90, "loss_rate": 0.1}\n', encoding="utf-8")

    assert [sample.rtt_ms for sample in load_stats_trace(path)] == [60, 90]


def test_rejects_unknown_suffix(tmp_path) -> None:
    path = tmp_path / "trace.txt"
    path.write_text("", encoding="utf-8")

    with pytest.raises(TraceFormatError, match=".csv, .json or .jsonl"):
        load_stats_trace(path)


def test_rejects_csv_missing_columns(tmp_path) -> None:
    path = tmp_path / "trace.csv"
    path.write_text("rtt_ms,jitter_ms\n100,2\n", encoding="utf-8")

    with pytest.raises(TraceFormatError, match="missing required columns"):
        load_stats_trace(path)


def test_rejects_out_of_range_loss_with_sample_index(tmp_path) -> None:
    path = tmp_path / "trace.json"
    path.write_text(json.dumps([{"rtt_ms": 60, "loss_rate": 0.1}, {"rtt_ms": 60, "loss_rate": 1.5}]), encoding="utf-8")

    with pytest.raises(TraceFormatError, match="sample #2"):
        load_stats_trace(path)


def test_rejects_non_array_json(tmp_path) -> None:
    path = tmp_path / "trace.json"
    path.write_text(json.dumps({"rtt_ms": 60}), encoding="utf-8")

    with pytest.raises(TraceFormatError):
        load_stats_trace(path)


def test_rejects_empty_trace(tmp_path) -> None:
    path = tmp_path / "trace.json"
    path.write_text("[]", encoding="utf-8")

    with pytest.raises(TraceFormatError, match="does not contain any samples"):
        load_stats_trace(path)


def test_parse_timestamp_treats_zero_as_unset() -> None:
    assert parse_timestamp(0) is None
    assert parse_timestamp("0") is None
    assert parse_timestamp(None) is None


@pytest.mark.parametrize(
    "row",
    ["inf,0.1,", "nan,0.1,", "1e20,0.1,1e20", "100,0.1,inf"],
)
def test_rejects_non_finite_or_overflowing_values(tmp_path, row: str) -> None:
    path = tmp_path / "trace.csv"
    path.write_text(f"rtt_ms,loss_rate,timestamp\n{row}\n", encoding="utf-8")

    with pytest.raises(TraceFormatError, match="sample #1"):
        load_stats_trace(path)
