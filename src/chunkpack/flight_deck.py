"""Flight Deck - a TUI for splitting files and copying chunks."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from pathlib import Path

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical
from textual.message import Message
from textual.widgets import (
    Button,
    DataTable,
    DirectoryTree,
    Footer,
    Header,
    Input,
    Label,
    Log,
    ProgressBar,
    Rule,
    Static,
)

from chunkpack.exporters import ZipExporter, chunk_payloads
from chunkpack.ingesters import get_ingester
from chunkpack.models import Chunk, Document
from chunkpack.packer import SizePacker
from chunkpack.pipeline import split_document


@dataclass
class SplitStats:
    """Statistics tracked during a split run."""

    files_discovered: int = 0
    files_processed: int = 0
    text_files: int = 0
    skipped_files: int = 0
    blocks_created: int = 0
    chunks_created: int = 0
    total_bytes: int = 0
    current_file: str = ""
    status: str = "idle"
    start_time: datetime | None = None
    end_time: datetime | None = None

    @property
    def elapsed(self) -> str:
        if not self.start_time:
            return "00:00"
        end = self.end_time or datetime.now()
        minutes, seconds = divmod(int((end - self.start_time).total_seconds()), 60)
        return f"{minutes:02d}:{seconds:02d}"

    def copy(self) -> SplitStats:
        return replace(self)


class StatsPanel(Static):
    """Real-time statistics display."""

    def compose(self) -> ComposeResult:
        yield Static(id="stats-content")

    def on_mount(self) -> None:
        self.update_display(SplitStats())

    def update_display(self, stats: SplitStats) -> None:
        content = self.query_one("#stats-content", Static)
        status_color = {
            "idle": "dim",
            "running": "green",
            "complete": "cyan",
            "error": "red",
        }.get(stats.status, "white")

        content.update(f"""[b]STATUS[/b]  [{status_color}]{stats.status.upper()}[/]

[b]TIME[/b]    {stats.elapsed}

[b]FILES[/b]
  Discovered  [cyan]{stats.files_discovered:,}[/]
  Text        [blue]{stats.text_files:,}[/]
  Skipped     [dim]{stats.skipped_files:,}[/]

[b]SPLIT[/b]
  Blocks      [yellow]{stats.blocks_created:,}[/]
  Chunks      [magenta]{stats.chunks_created:,}[/]

[b]SIZE[/b]
  Total       [cyan]{stats.total_bytes / 1024:.1f} KB[/]""")


class CurrentFileDisplay(Static):
    """Display for the file being split."""

    def compose(self) -> ComposeResult:
        yield Static("[dim]Waiting for source...[/]", id="current-file-content")

    def update_file(self, file: str) -> None:
        content = self.query_one("#current-file-content", Static)
        if file:
            display = file if len(file) < 50 else "..." + file[-47:]
            content.update(f"[bold cyan]>[/] {display}")
        else:
            content.update("[dim]Waiting for source...[/]")


class ChunkTable(DataTable):
    """One row per produced chunk."""

    def on_mount(self) -> None:
        self.add_columns("File", "Kind", "Chunk", "Lines", "Size")
        self.cursor_type = "row"

    def add_chunk(self, chunk: Chunk, kind: str, total: int) -> None:
        size = chunk.size_bytes
        size_str = f"{size / 1024:.1f}KB" if size >= 1024 else f"{size}B"
        display_name = Path(chunk.file_path).name
        if len(display_name) > 30:
            display_name = display_name[:27] + "..."
        self.add_row(
            display_name,
            f"[blue]{kind}[/]",
            f"[magenta]{chunk.chunk_index + 1}/{total}[/]",
            f"{chunk.start_line + 1}-{chunk.end_line}",
            size_str,
        )
        self.scroll_end()


class FlightDeck(App):
    """The chunkpack Flight Deck."""

    # Messages for thread-safe communication
    class StatsUpdated(Message):
        def __init__(self, stats: SplitStats) -> None:
            self.stats = stats
            super().__init__()

    class LogMessage(Message):
        def __init__(self, message: str) -> None:
            self.message = message
            super().__init__()

    class FileSplit(Message):
        def __init__(self, kind: str, chunks: list[Chunk]) -> None:
            self.kind = kind
            self.chunks = chunks
            super().__init__()

    CSS = """
    Screen {
        background: $surface;
    }

    #main-container {
        layout: horizontal;
        height: 100%;
    }

    #left-panel {
        width: 35;
        background: $surface-darken-1;
        border-right: solid $primary-darken-2;
        padding: 1;
    }

    #center-panel {
        width: 1fr;
        padding: 1;
    }

    #right-panel {
        width: 30;
        background: $surface-darken-1;
        border-left: solid $primary-darken-2;
        padding: 1;
    }

    StatsPanel {
        height: auto;
        padding: 1;
        background: $surface-darken-2;
        border: round $primary;
        margin-bottom: 1;
    }

    CurrentFileDisplay {
        height: 3;
        padding: 1;
        background: $boost;
        border: round $secondary;
        margin-bottom: 1;
    }

    #source-input, #max-bytes-input {
        margin-bottom: 1;
    }

    #action-buttons {
        layout: horizontal;
        height: 3;
    }

    #action-buttons Button {
        margin-right: 1;
    }

    ChunkTable {
        height: 1fr;
        border: round $primary-darken-1;
    }

    #progress-bar {
        width: 100%;
        margin-bottom: 1;
    }

    #log-panel {
        height: 10;
        border: round $primary-darken-2;
        background: $surface-darken-2;
    }

    .section-title {
        text-style: bold;
        margin-bottom: 1;
    }

    DirectoryTree {
        height: 100%;
        border: round $primary-darken-1;
        background: $surface-darken-2;
    }
    """

    BINDINGS = [
        Binding("s", "split", "Split", show=True),
        Binding("y", "copy_chunk", "Copy chunk", show=True),
        Binding("e", "export", "Export zip", show=True),
        Binding("c", "clear", "Clear", show=True),
        Binding("q", "quit", "Quit", show=True),
        Binding("d", "toggle_theme", "Toggle Dark Mode"),
    ]

    TITLE = "chunkpack Flight Deck"
    SUB_TITLE = "Split files for size-limited contexts"

    EXPORT_PATH = Path("chunks.zip")

    def __init__(self) -> None:
        super().__init__()
        self.chunks: list[Chunk] = []

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Container(id="main-container"):
            with Vertical(id="left-panel"):
                yield Label("CONTROL", classes="section-title")
                yield StatsPanel()
                yield CurrentFileDisplay()
                yield Rule()
                yield Label("Source Path")
                yield Input(placeholder="File, folder or .zip path...", id="source-input")
                yield Label("Max bytes per chunk")
                yield Input(
                    value=str(SizePacker.DEFAULT_MAX_BYTES),
                    type="integer",
                    id="max-bytes-input",
                )
                with Horizontal(id="action-buttons"):
                    yield Button("SPLIT", id="split-btn", variant="success")
                    yield Button("Clear", id="clear-btn", variant="warning")

            with Vertical(id="center-panel"):
                yield Label("CHUNKS", classes="section-title")
                yield ProgressBar(id="progress-bar", show_eta=False)
                yield ChunkTable(id="chunk-table")
                yield Rule()
                yield Label("SYSTEM LOG", classes="section-title")
                yield Log(id="log-panel", highlight=True, auto_scroll=True)

            with Vertical(id="right-panel"):
                yield Label("FILE BROWSER", classes="section-title")
                yield DirectoryTree(Path.cwd(), id="dir-tree")

        yield Footer()

    def on_mount(self) -> None:
        self._log("Flight Deck initialized")
        self._log("Enter a source path and press SPLIT, then [y] to copy a chunk")

    def _log(self, message: str) -> None:
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.query_one("#log-panel", Log).write_line(f"[{timestamp}] {message}")

    # Message handlers for thread-safe updates
    def on_flight_deck_stats_updated(self, event: StatsUpdated) -> None:
        stats = event.stats
        self.query_one(StatsPanel).update_display(stats)
        self.query_one(CurrentFileDisplay).update_file(stats.current_file)
        if stats.files_discovered > 0:
            self.query_one("#progress-bar", ProgressBar).update(
                total=stats.files_discovered, progress=stats.files_processed
            )

    def on_flight_deck_log_message(self, event: LogMessage) -> None:
        self._log(event.message)

    def on_flight_deck_file_split(self, event: FileSplit) -> None:
        table = self.query_one("#chunk-table", ChunkTable)
        for chunk in event.chunks:
            table.add_chunk(chunk, event.kind, len(event.chunks))
        self.chunks.extend(event.chunks)

    def on_directory_tree_file_selected(self, event: DirectoryTree.FileSelected) -> None:
        self.query_one("#source-input", Input).value = str(event.path)

    def on_directory_tree_directory_selected(
        self, event: DirectoryTree.DirectorySelected
    ) -> None:
        self.query_one("#source-input", Input).value = str(event.path)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "split-btn":
            self.action_split()
        elif event.button.id == "clear-btn":
            self.action_clear()

    def action_toggle_theme(self) -> None:
        self.theme = "textual-light" if self.theme == "textual-dark" else "textual-dark"

    def action_clear(self) -> None:
        """Clear the table and log, and reset stats."""
        self.chunks = []
        self.query_one(StatsPanel).update_display(SplitStats())
        self.query_one(CurrentFileDisplay).update_file("")
        self.query_one("#chunk-table", ChunkTable).clear()
        self.query_one("#log-panel", Log).clear()
        self.query_one("#progress-bar", ProgressBar).update(total=None, progress=0)
        self._log("Cleared - ready for new run")

    def action_copy_chunk(self) -> None:
        """Copy the highlighted chunk's text to the system clipboard."""
        row = self.query_one("#chunk-table", ChunkTable).cursor_row
        if not self.chunks or not 0 <= row < len(self.chunks):
            self._log("[yellow]No chunk selected[/]")
            return
        chunk = self.chunks[row]
        self.copy_to_clipboard(chunk.text)
        self._log(
            f"Copied {chunk.file_path} part {chunk.chunk_index + 1} ({chunk.size_bytes} bytes)"
        )

    def action_export(self) -> None:
        """Bundle every chunk into one zip archive."""
        if not self.chunks:
            self._log("[yellow]Nothing to export[/]")
            return
        try:
            count = ZipExporter().export(chunk_payloads(self.chunks), self.EXPORT_PATH)
        except OSError as e:
            self._log(f"[red]ERROR: Export failed: {e}[/]")
            return
        self._log(f"[cyan]Exported {count} chunks -> {self.EXPORT_PATH}[/]")

    def action_split(self) -> None:
        """Start the split pipeline."""
        source = self.query_one("#source-input", Input).value.strip()
        if not source:
            self._log("[red]ERROR: No source path specified[/]")
            return
        raw_budget = self.query_one("#max-bytes-input", Input).value.strip()
        try:
            max_bytes = int(raw_budget)
        except ValueError:
            max_bytes = 0
        if max_bytes <= 0:
            self._log(f"[red]ERROR: Max bytes must be a positive integer, got {raw_budget!r}[/]")
            return

        self.action_clear()
        self.run_split(source, max_bytes)

    @work(exclusive=True, thread=True)
    def run_split(self, source: str, max_bytes: int) -> None:
        """Run the split pipeline in a background thread."""
        source_path = Path(source)

        stats = SplitStats(status="running", start_time=datetime.now())
        self.post_message(self.StatsUpdated(stats.copy()))
        self.post_message(self.LogMessage(f"Loading source: {source}"))

        ingester = get_ingester(source_path) if source_path.exists() else None
        if ingester is None:
            stats.status = "error"
            self.post_message(self.StatsUpdated(stats.copy()))
            self.post_message(
                self.LogMessage(f"[red]ERROR: Cannot read {source} (use a file, folder or .zip)[/]")
            )
            return

        self.post_message(self.LogMessage(f"Ingester: {ingester.source_type}"))

        docs: list[Document] = list(ingester.ingest(source_path))
        stats.files_discovered = len(docs)
        self.post_message(self.StatsUpdated(stats.copy()))
        self.post_message(self.LogMessage(f"Found {stats.files_discovered} files"))

        for doc in docs:
            stats.current_file = doc.name
            stats.total_bytes += doc.metadata.size_bytes

            result = split_document(doc, max_bytes)
            if result is None:
                stats.skipped_files += 1
            else:
                stats.text_files += 1
                stats.blocks_created += len(result.blocks)
                stats.chunks_created += len(result.chunks)
                self.post_message(self.FileSplit(result.kind.value, result.chunks))

            stats.files_processed += 1
            self.post_message(self.StatsUpdated(stats.copy()))

        stats.status = "complete"
        stats.current_file = ""
        stats.end_time = datetime.now()
        self.post_message(self.StatsUpdated(stats.copy()))
        self.post_message(
            self.LogMessage(
                f"[cyan]COMPLETE: {stats.text_files} files, "
                f"{stats.chunks_created} chunks of <= {max_bytes} bytes[/]"
            )
        )


def main() -> None:
    """Run the Flight Deck TUI."""
    app = FlightDeck()
    app.run()


if __name__ == "__main__":
    main()
