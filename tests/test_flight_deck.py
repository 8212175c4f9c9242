"""Smoke test for the Flight Deck TUI."""

import asyncio
import zipfile

from textual.widgets import Input, Log

from chunkpack.flight_deck import ChunkTable, FlightDeck


def test_split_and_export(source_tree, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    async def drive() -> FlightDeck:
        app = FlightDeck()
        async with app.run_test() as pilot:
            app.query_one("#source-input", Input).value = str(source_tree / "src")
            app.query_one("#max-bytes-input", Input).value = "40"
            app.action_split()
            await app.workers.wait_for_complete()
            await pilot.pause()
            app.action_export()
        return app

    app = asyncio.run(drive())

    assert len(app.chunks) >= 2
    assert {chunk.file_path for chunk in app.chunks} == {"math.c", "store.py"}
    with zipfile.ZipFile(tmp_path / "chunks.zip") as zf:
        assert "math_part01.txt" in zf.namelist()


def test_copy_highlighted_chunk(source_tree):
    async def drive() -> tuple[FlightDeck, str]:
        app = FlightDeck()
        async with app.run_test() as pilot:
            app.query_one("#source-input", Input).value = str(source_tree / "src")
            app.query_one("#max-bytes-input", Input).value = "40"
            app.action_split()
            await app.workers.wait_for_complete()
            await pilot.pause()
            app.query_one("#chunk-table", ChunkTable).move_cursor(row=1)
            await pilot.pause()
            app.action_copy_chunk()
            copied = app.clipboard
        return app, copied

    app, copied = asyncio.run(drive())

    assert copied == app.chunks[1].text


def test_copy_without_chunks_leaves_clipboard_alone():
    async def drive() -> tuple[str, list[str]]:
        app = FlightDeck()
        async with app.run_test() as pilot:
            app.action_copy_chunk()
            await pilot.pause()
            return app.clipboard, list(app.query_one("#log-panel", Log).lines)

    clipboard, log_lines = asyncio.run(drive())

    assert clipboard == ""
    assert any("No chunk selected" in line for line in log_lines)
