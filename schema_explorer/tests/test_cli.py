import gzip
import json

import pytest

from schema_explorer.cli import build_parser, main


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "sample.json"
    path.write_text(
        json.dumps(
            [
                {"address": {"street": "Main", "city": "Oslo"}, "n": 1},
                {"address": {"street": "High", "city": "Rome", "zip": "00100"}},
            ]
        ),
        encoding="utf-8",
    )
    return path


def test_parser_defaults():
    args = build_parser().parse_args(["-f", "input.json"])

    assert args.file == "input.json"
    assert args.merge_objects is False
    assert args.compact is False
    assert args.verbose == 0


def test_file_is_required(capsys):
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args([])
    assert excinfo.value.code != 0


def test_prints_split_schema(sample_file, capsys):
    assert main(["-f", str(sample_file)]) == 0

    document = json.loads(capsys.readouterr().out)
    assert len(document["address"]["types"]) == 2
    assert document["n"] == {"types": ["NUMBER"]}


def test_prints_merged_schema(sample_file, capsys):
    assert main(["--file", str(sample_file), "--merge-objects"]) == 0

    document = json.loads(capsys.readouterr().out)
    merged = document["address"]["types"]
    assert len(merged) == 1
    assert set(merged[0]) == {"street", "city", "zip"}


def test_compact_output(sample_file, capsys):
    assert main(["-f", str(sample_file), "-m", "--compact", "--sort-keys"]) == 0

    out = capsys.readouterr().out.strip()
    assert "\n" not in out
    assert out.startswith('{"address":')


def test_reads_compressed_input(tmp_path, capsys):
    path = tmp_path / "sample.json.gz"
    with gzip.open(path, "wt", encoding="utf-8") as f:
        f.write('{"ok": true}')

    assert main(["-f", str(path)]) == 0
    assert json.loads(capsys.readouterr().out) == {"ok": {"types": ["BOOL"]}}


def test_missing_file_exits_non_zero(tmp_path, capsys):
    assert main(["-f", str(tmp_path / "nope.json")]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "error:" in captured.err


def test_malformed_json_exits_non_zero(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")

    assert main(["-f", str(path)]) == 1
    assert capsys.readouterr().out == ""


def test_scalar_document_exits_non_zero(tmp_path, capsys):
    path = tmp_path / "scalar.json"
    path.write_text("42", encoding="utf-8")

    assert main(["-f", str(path)]) == 1
    assert "object or array" in capsys.readouterr().err


def test_corrupt_gzip_exits_non_zero(tmp_path, capsys):
    payload = bytearray(gzip.compress(b'[{"a": 1}, {"a": "x"}]' * 50))
    for i in range(10, len(payload) - 8):
        payload[i] ^= 0xFF
    path = tmp_path / "corrupt.json.gz"
    path.write_bytes(bytes(payload))

    assert main(["-f", str(path)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "error:" in captured.err


def test_deeply_nested_input_exits_non_zero(tmp_path, capsys):
    depth = 200000
    path = tmp_path / "deep.json"
    path.write_text("[" * depth + "]" * depth, encoding="utf-8")

    assert main(["-f", str(path)]) == 1
    assert "nested too deeply" in capsys.readouterr().err
