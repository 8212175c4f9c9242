"""Tests for greedy size packing."""

import pytest

from chunkpack.models import Block
from chunkpack.packer import SizePacker, pack_blocks


def block(*lines, start=0):
    return Block(lines=tuple(lines), start_line=start)


def texts(chunks):
    return [chunk.text for chunk in chunks]


@pytest.mark.parametrize("max_bytes", [0, -1, True, 1.5, "100"])
def test_rejects_invalid_budget(max_bytes):
    with pytest.raises(ValueError):
        SizePacker(max_bytes)


def test_no_blocks_no_chunks():
    assert pack_blocks([], 100) == []


def test_blocks_merge_while_joined_text_fits():
    blocks = [block("aaaa", start=0), block("bbbb", start=1)]
    # 4 + newline + 4 == 9
    assert texts(pack_blocks(blocks, 9)) == ["aaaa\nbbbb"]
    assert texts(pack_blocks(blocks, 8)) == ["aaaa", "bbbb"]


def test_oversized_block_degrades_to_lines():
    # three 50-byte lines: 51 + 51 fits in 120, the third does not
    line = "x" * 50
    chunks = pack_blocks([block(line, line, line)], 120)
    assert [chunk.lines for chunk in chunks] == [(line, line), (line,)]
    assert [chunk.size_bytes for chunk in chunks] == [101, 50]
    assert [(c.start_line, c.end_line) for c in chunks] == [(0, 2), (2, 3)]


def test_overlong_line_stands_alone():
    chunks = pack_blocks([block("a" * 10, "b", "c", start=3)], 5)
    assert [chunk.lines for chunk in chunks] == [("a" * 10,), ("b", "c")]
    assert [(c.start_line, c.end_line) for c in chunks] == [(3, 4), (4, 6)]


def test_degraded_region_is_not_merged_with_neighbours():
    blocks = [block("x", start=0), block("y" * 10, start=1), block("z", start=2)]
    assert texts(pack_blocks(blocks, 5)) == ["x", "y" * 10, "z"]


def test_size_counts_utf8_bytes():
    # "é" is two bytes; two of them exceed a 3-byte budget on one line
    chunks = pack_blocks([block("éé")], 3)
    assert len(chunks) == 1
    assert chunks[0].size_bytes == 4


def test_chunks_are_indexed_and_tagged():
    blocks = [block("one", start=0), block("two", start=1), block("three", start=2)]
    chunks = SizePacker(5).pack(blocks, file_path="src/a.txt")
    assert [c.chunk_index for c in chunks] == [0, 1, 2]
    assert {c.file_path for c in chunks} == {"src/a.txt"}


def test_byte_bound_holds_except_single_long_lines():
    blocks = [
        block("alpha beta", "gamma", start=0),
        block("delta", start=2),
        block("e" * 40, "f" * 3, "g" * 12, start=3),
        block("h", start=6),
    ]
    for max_bytes in range(1, 60):
        for chunk in pack_blocks(blocks, max_bytes):
            assert chunk.size_bytes <= max_bytes or len(chunk.lines) == 1
