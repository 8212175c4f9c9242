"""Tests for the command-line interface."""

import zipfile

import pytest

from chunkpack.cli import build_parser, main


def test_split_to_folder(source_tree, tmp_path):
    out = tmp_path / "chunks"
    main(["split", str(source_tree), "-m", "40", "-o", str(out)])

    written = sorted(p.relative_to(out).as_posix() for p in out.rglob("*.txt"))
    assert "src/math_part01.txt" in written
    assert "src/math_part02.txt" in written
    assert "docs/README_part01.txt" in written
    # binary files produce no chunks
    assert not any(name.startswith("blob") for name in written)
    for path in out.rglob("*.txt"):
        text = path.read_text(encoding="utf-8")
        assert len(text.encode("utf-8")) <= 40 or "\n" not in text


def test_split_to_zip(source_tree, tmp_path):
    out = tmp_path / "chunks.zip"
    main(["split", str(source_tree / "src" / "math.c"), "-o", str(out)])

    with zipfile.ZipFile(out) as zf:
        assert zf.namelist() == ["math_part01.txt"]


def test_split_rejects_non_positive_budget(source_tree, tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["split", str(source_tree), "-m", "0", "-o", str(tmp_path / "out")])
    assert exc.value.code == 1
    assert not (tmp_path / "out").exists()


def test_missing_source_exits(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["classify", str(tmp_path / "nope")])
    assert exc.value.code == 1


def test_classify_prints_kinds(source_tree, capsys):
    main(["classify", str(source_tree)])
    out = capsys.readouterr().out.splitlines()
    assert [line.split() for line in out] == [
        ["binary", "blob.txt"],
        ["markdown", "docs/README.md"],
        ["cstyle", "src/math.c"],
        ["python", "src/store.py"],
    ]


def test_merge(source_tree, tmp_path):
    out = tmp_path / "merged.txt"
    main(["merge", str(source_tree / "src"), "-o", str(out)])
    merged = out.read_text(encoding="utf-8")
    assert merged.startswith("----- math.c -----\nint add")
    assert "----- store.py -----\nimport os" in merged


def test_merge_without_headers(source_tree, tmp_path):
    out = tmp_path / "merged.txt"
    main(["merge", str(source_tree / "docs"), "-o", str(out), "--no-headers"])
    assert "-----" not in out.read_text(encoding="utf-8")


def test_convert_to_folder(source_tree, tmp_path):
    out = tmp_path / "converted"
    main(["convert", str(source_tree / "src"), "-o", str(out)])
    assert sorted(p.name for p in out.iterdir()) == ["math.txt", "store.txt"]


def test_convert_defaults_to_zip_bundle(source_tree, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    main(["convert", str(source_tree / "src")])
    with zipfile.ZipFile(tmp_path / "converted_files.zip") as zf:
        assert sorted(zf.namelist()) == ["math.txt", "store.txt"]


def test_parser_defaults():
    args = build_parser().parse_args(["split", "src"])
    assert args.max_bytes == 12_000
    assert args.output == "chunks"
    assert not args.all_extensions
