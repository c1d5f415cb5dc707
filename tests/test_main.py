import csv

import pytest

import main
from src.matchers import analyze


def _write_csv(path, header, rows):
    with open(path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(header)
        writer.writerows(rows)


def test_load_responses_from_csv(tmp_path):
    path = tmp_path / "responses.csv"
    _write_csv(path, ["business_name", "response_text", "model_name"], [
        ["Tesla Inc", "Tesla leads in electric vehicles.", "gpt"],
        ["Acme", "", ""],
    ])

    rows = main.load_responses_from_csv(str(path))

    assert [name for name, _ in rows] == ["Tesla Inc", "Acme"]
    first = rows[0][1]
    assert first.response_id == "0"
    assert first.model_name == "gpt"
    assert first.response_text == "Tesla leads in electric vehicles."
    assert rows[1][1].response_text == ""


def test_load_responses_requires_columns(tmp_path):
    path = tmp_path / "responses.csv"
    _write_csv(path, ["name", "text"], [["Acme", "Acme rocks"]])

    with pytest.raises(ValueError, match="response_text"):
        main.load_responses_from_csv(str(path))


def test_batch_iter():
    batches = list(main.batch_iter(list(range(5)), 2))
    assert batches == [(0, [0, 1]), (2, [2, 3]), (4, [4])]


def test_result_row():
    rows = [("Tesla Inc", main.ResponseRecord("r1", "gpt", "Tesla leads. Elon Musk founded Tesla."))]
    name, record = rows[0]
    row = main.result_row(record, analyze(record.response_text, name))

    assert row == ["Tesla Inc", "r1", "gpt", True, 2, 90, 90, 0, 0, 2, 0]


@pytest.mark.asyncio
async def test_main_writes_output(tmp_path, monkeypatch):
    input_path = tmp_path / "in.csv"
    output_path = tmp_path / "out.csv"
    _write_csv(input_path, ["business_name", "response_text", "response_id"], [
        ["JPMorgan Chase", "JPMorgan Chase is a bank. Chase Bank offers mobile banking.", "a"],
        ["Acme Rocket Co", "We recommend checking several vendors before deciding.", "b"],
        ["Tesla Inc", "Tesla leads in electric vehicles.", "c"],
    ])
    monkeypatch.setattr(main, "INPUT_CSV", str(input_path))
    monkeypatch.setattr(main, "OUTPUT_CSV", str(output_path))
    monkeypatch.setattr(main, "BATCH_SIZE", 2)

    await main.main()

    with open(output_path, newline="") as f:
        out = list(csv.DictReader(f))
    assert [r["response_id"] for r in out] == ["a", "b", "c"]
    assert [r["mentioned"] for r in out] == ["True", "False", "True"]
    assert out[0]["exact"] == "1" and out[0]["partial"] == "1"
    assert out[1]["first_position"] == "-1"
