"""Tests for content-kind classification."""

import pytest

from chunkpack.classifier import KindClassifier, classify
from chunkpack.models import Kind

from conftest import LOG_SOURCE, MARKDOWN_SOURCE, PYTHON_SOURCE


@pytest.mark.parametrize(
    "name,kind",
    [
        ("deploy.PS1", Kind.POWERSHELL),
        ("tool.pyw", Kind.PYTHON),
        ("app.tsx", Kind.JS),
        ("config.json", Kind.JSON),
        ("events.jsonl", Kind.NDJSON),
        ("events.ndjson", Kind.NDJSON),
        ("Program.cs", Kind.CSTYLE),
        ("header.H", Kind.CSTYLE),
        ("main.go", Kind.CSTYLE),
        ("task.rb", Kind.RUBY),
        ("notes.md", Kind.MARKDOWN),
        ("server.log", Kind.LOG),
        ("ci.yml", Kind.YAML),
        ("pom.xml", Kind.XML),
        ("index.htm", Kind.HTML),
    ],
)
def test_extension_table(name, kind):
    assert classify(name, "anything at all") is kind


def test_extension_wins_over_content():
    assert classify("data.md", '{"a":1}\n{"b":2}') is Kind.MARKDOWN


def test_empty_and_blank_content_is_text():
    assert classify("notes.txt", "") is Kind.TEXT
    assert classify("notes.txt", "\n   \n\t\n") is Kind.TEXT


def test_ndjson_from_content():
    assert classify("data.txt", '{"a":1}\n{"b":2}\n{"c":3}') is Kind.NDJSON


def test_ndjson_ratio_threshold():
    # 3 of 5 non-blank lines is exactly 60%
    three = '{"a":1}\n{"b":2}\n[3],\nfoo\nbar'
    assert classify("data.txt", three) is Kind.NDJSON

    # 2 of 5 falls short; the first line still makes it JSON
    two = '{"a":1}\n{"b":2}\nfoo\nbar\nbaz'
    assert classify("data.txt", two) is Kind.JSON


def test_pretty_json_from_first_line():
    assert classify("payload", '  {\n  "a": 1,\n  "b": [1, 2]\n}') is Kind.JSON


def test_markdown_needs_three_headings():
    assert classify("notes.txt", MARKDOWN_SOURCE + "\n### Extra") is Kind.MARKDOWN
    assert classify("notes.txt", "# one\n# two\nplain") is Kind.TEXT


def test_python_from_definitions():
    assert classify("script", PYTHON_SOURCE) is Kind.PYTHON


def test_cstyle_from_braces_and_keywords():
    assert classify("main.cc", "int main() {\n  return 0;\n}\nvoid f() {\n}") is Kind.CSTYLE
    assert classify("lib.kt", "interface Shape\nfunction area") is Kind.CSTYLE


def test_log_from_timestamps():
    assert classify("output.txt", LOG_SOURCE) is Kind.LOG


def test_log_ratio_counts_blank_lines():
    # 1 stamped line of 3 sample lines meets 30%; 1 of 5 does not
    assert classify("out.txt", "12:00:00 boot\n\n") is Kind.LOG
    assert classify("out.txt", "12:00:00 boot\n\n\n\n") is Kind.TEXT


def test_rules_are_ordered():
    # markdown is tested before python
    assert classify("x.txt", "# a\n# b\n# c\ndef f():\ndef g():") is Kind.MARKDOWN
    # python is tested before cstyle, though "class" matches both
    assert classify("x.txt", "class A:\n    pass\nclass B:\n    pass") is Kind.PYTHON


def test_only_sample_is_inspected():
    content = "\n" * KindClassifier.SAMPLE_SIZE + "# a\n# b\n# c"
    assert classify("notes.txt", content) is Kind.TEXT


def test_classification_is_deterministic():
    results = {classify("mystery", LOG_SOURCE) for _ in range(5)}
    assert results == {Kind.LOG}
