import pytest

from aoc.receipts import (
    ReceiptWriter,
    build_answer_receipt,
    find_receipt,
    read_receipts,
    write_jsonl,
)


def test_build_answer_receipt():
    receipt = build_answer_receipt(3, "ab" * 32, 161, 48, (1.23456, 0.5))
    assert receipt == {
        "day": 3,
        "input_sha256": "ab" * 32,
        "part1": 161,
        "part2": 48,
        "elapsed_ms": [1.235, 0.5],
    }


def test_write_and_read_back(tmp_path):
    out = tmp_path / "nested" / "receipts.jsonl"
    receipts = [
        build_answer_receipt(1, "0" * 64, 11, 31, (0.1, 0.2)),
        build_answer_receipt(2, "1" * 64, 2, 4, (0.1, 0.2)),
    ]
    write_jsonl(out, receipts)

    lines = out.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert read_receipts(out) == receipts


def test_find_receipt_returns_latest(tmp_path):
    out = tmp_path / "receipts.jsonl"
    write_jsonl(out, [
        build_answer_receipt(1, "0" * 64, 1, 1, (0, 0)),
        build_answer_receipt(1, "0" * 64, 2, 2, (0, 0)),
    ])
    assert find_receipt(out, 1)["part1"] == 2
    assert find_receipt(out, 7) is None


def test_writer_requires_context_manager(tmp_path):
    writer = ReceiptWriter(tmp_path / "r.jsonl")
    with pytest.raises(RuntimeError):
        writer.write({"day": 1})


def test_append_keeps_earlier_receipts(tmp_path):
    out = tmp_path / "receipts.jsonl"
    write_jsonl(out, [build_answer_receipt(1, "0" * 64, 11, 31, (0, 0))])
    write_jsonl(out, [build_answer_receipt(1, "0" * 64, 12, 32, (0, 0))], append=True)

    assert [r["part1"] for r in read_receipts(out)] == [11, 12]
    assert find_receipt(out, 1)["part1"] == 12


def test_writer_tracks_days_and_rejects_dayless(tmp_path):
    with ReceiptWriter(tmp_path / "r.jsonl") as writer:
        writer.write(build_answer_receipt(5, "0" * 64, 143, 123, (0, 0)))
        with pytest.raises(ValueError):
            writer.write({"part1": 1})
    assert writer.days_written == [5]


def test_read_receipts_reports_bad_line(tmp_path):
    out = tmp_path / "receipts.jsonl"
    out.write_text('{"day": 1}\n\n{not json\n', encoding="utf-8")
    with pytest.raises(ValueError, match=":3:"):
        read_receipts(out)

    out.write_text('[1, 2]\n', encoding="utf-8")
    with pytest.raises(ValueError):
        read_receipts(out)
