"""Tests for reading files, folders and zip archives."""

import zipfile

from chunkpack.ingesters import (
    FileIngester,
    FolderIngester,
    ZipIngester,
    get_ingester,
)


def names(docs):
    return [doc.name for doc in docs]


def test_folder_skips_hidden_build_and_unsupported(source_tree):
    docs = list(FolderIngester().ingest(source_tree))
    assert names(docs) == ["blob.txt", "docs/README.md", "src/math.c", "src/store.py"]


def test_folder_binary_content_is_none(source_tree):
    docs = {doc.name: doc for doc in FolderIngester().ingest(source_tree)}
    assert docs["blob.txt"].content is None
    assert docs["blob.txt"].metadata.is_binary
    assert docs["src/math.c"].content.startswith("int add")
    assert docs["src/math.c"].metadata.extension == ".c"


def test_folder_size_ceiling(source_tree):
    (source_tree / "big.log").write_text("x" * 500)
    docs = FolderIngester(max_file_size=100).ingest(source_tree)
    assert "big.log" not in names(docs)


def test_folder_all_extensions(source_tree):
    docs = FolderIngester(supported_only=False).ingest(source_tree)
    assert "logo.png" in names(docs)


def test_single_file(source_tree):
    ingester = FileIngester()
    docs = list(ingester.ingest(source_tree / "src" / "store.py"))
    assert names(docs) == ["store.py"]
    assert list(ingester.ingest(source_tree / ".env.txt")) == []
    assert list(FileIngester(max_file_size=10).ingest(source_tree / "src" / "store.py")) == []


def test_utf8_bom_is_dropped(tmp_path):
    path = tmp_path / "bom.txt"
    path.write_bytes(b"\xef\xbb\xbfhello")
    (doc,) = FileIngester().ingest(path)
    assert doc.content == "hello"


def test_zip_members(tmp_path):
    archive = tmp_path / "bundle.zip"
    with zipfile.ZipFile(archive, "w") as zf:
        zf.writestr("folder/", "")
        zf.writestr("a.py", "def a():\n    pass\n")
        zf.writestr(".env", "SECRET=1")
        zf.writestr("dir/.hidden/x.py", "x = 1")
        zf.writestr("dir/ok.md", "# ok")
        zf.writestr("big.log", "x" * 500)
        zf.writestr("image.png", "png")

    docs = list(ZipIngester(max_file_size=100).ingest(archive))
    assert names(docs) == ["a.py", "dir/ok.md"]
    assert docs[1].content == "# ok"


def test_get_ingester_by_source(tmp_path, source_tree):
    archive = tmp_path / "bundle.zip"
    with zipfile.ZipFile(archive, "w") as zf:
        zf.writestr("a.py", "pass")

    assert isinstance(get_ingester(archive), ZipIngester)
    assert isinstance(get_ingester(source_tree), FolderIngester)
    assert isinstance(get_ingester(source_tree / "src" / "math.c"), FileIngester)
    assert get_ingester(tmp_path / "missing") is None


def test_get_ingester_with_overrides(source_tree):
    ingester = get_ingester(source_tree, max_file_size=10, supported_only=False)
    assert isinstance(ingester, FolderIngester)
    assert ingester.filter.max_file_size == 10
    assert not ingester.filter.supported_only
