"""Flight Deck - an interactive TUI for running chunk hunts."""

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

from chunkhunter.errors import HuntError
from chunkhunter.pipeline import ChunkHunt, HuntConfig


@dataclass
class HuntStats:
    """Statistics tracked during a hunt."""

    files_discovered: int = 0
    files_processed: int = 0
    unreadable_files: int = 0
    failed_writes: int = 0
    chunks_loaded: int = 0
    matches: int = 0
    chunkwords: int = 0
    words: int = 0
    current_file: str = ""
    status: str = "idle"
    start_time: datetime | None = None
    end_time: datetime | None = None

    @property
    def elapsed(self) -> str:
        if not self.start_time:
            return "00:00"
        end = self.end_time or datetime.now()
        delta = end - self.start_time
        minutes, seconds = divmod(int(delta.total_seconds()), 60)
        return f"{minutes:02d}:{seconds:02d}"

    @property
    def density(self) -> str:
        if self.words == 0:
            return "0.00%"
        return f"{self.chunkwords / self.words * 100:.2f}%"

    def copy(self) -> "HuntStats":
        """Create a copy of the stats."""
        return replace(self)


class StatsPanel(Static):
    """Real-time statistics display."""

    def compose(self) -> ComposeResult:
        yield Static(id="stats-content")

    def on_mount(self) -> None:
        self.update_display(HuntStats())

    def update_display(self, stats: HuntStats) -> None:
        content = self.query_one("#stats-content", Static)
        status_color = {
            "idle": "dim",
            "loading": "yellow",
            "running": "green",
            "complete": "cyan",
            "error": "red",
        }.get(stats.status, "white")

        content.update(f"""[b]STATUS[/b]  [{status_color}]{stats.status.upper()}[/]

[b]TIME[/b]    {stats.elapsed}

[b]FILES[/b]
  Discovered  [cyan]{stats.files_discovered:,}[/]
  Processed   [green]{stats.files_processed:,}[/]
  Unreadable  [yellow]{stats.unreadable_files:,}[/]
  Failed      [red]{stats.failed_writes:,}[/]

[b]CHUNKS[/b]
  Dictionary  [magenta]{stats.chunks_loaded:,}[/]
  Matches     [magenta]{stats.matches:,}[/]
  Chunkwords  [yellow]{stats.chunkwords:,}[/]
  Words       [blue]{stats.words:,}[/]
  Density     [cyan]{stats.density}[/]""")


class CurrentFileDisplay(Static):
    """Display for the document being matched."""

    def compose(self) -> ComposeResult:
        yield Static("[dim]Waiting for input...[/]", id="current-file-content")

    def update_file(self, file: str) -> None:
        content = self.query_one("#current-file-content", Static)
        if file:
            display = file if len(file) < 50 else "..." + file[-47:]
            content.update(f"[bold cyan]>[/] {display}")
        else:
            content.update("[dim]Waiting for input...[/]")


class FileLogTable(DataTable):
    """Live per-document results as a table."""

    def on_mount(self) -> None:
        self.add_columns("File", "Chunks", "Chunkwords", "Density")
        self.cursor_type = "row"

    def add_file(self, path: str, matches: int, chunkwords: int, density: str, written: bool) -> None:
        display_name = Path(path).name
        if len(display_name) > 30:
            display_name = display_name[:27] + "..."
        if not written:
            display_name = f"[red]{display_name}[/]"
        self.add_row(display_name, f"[magenta]{matches}[/]", str(chunkwords), f"{density}%")
        self.scroll_end()


class FlightDeck(App):
    """The Chunk Hunter Flight Deck."""

    # Messages for thread-safe communication
    class StatsUpdated(Message):
        def __init__(self, stats: HuntStats) -> None:
            self.stats = stats
            super().__init__()

    class LogMessage(Message):
        def __init__(self, message: str) -> None:
            self.message = message
            super().__init__()

    class FileProcessed(Message):
        def __init__(self, path: str, matches: int, chunkwords: int, density: str, written: bool) -> None:
            self.path = path
            self.matches = matches
            self.chunkwords = chunkwords
            self.density = density
            self.written = written
            super().__init__()

    CSS = """
    #main-container {
        layout: horizontal;
        height: 100%;
    }

    #left-panel {
        width: 38;
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

    #path-inputs Input {
        margin-bottom: 1;
    }

    #action-buttons {
        layout: horizontal;
        height: 3;
    }

    #action-buttons Button {
        margin-right: 1;
    }

    FileLogTable {
        height: 1fr;
        border: round $primary-darken-1;
    }

    #progress-bar {
        width: 100%;
        margin-bottom: 1;
    }

    #log-panel {
        height: 12;
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
        Binding("h", "hunt", "Hunt", show=True),
        Binding("c", "clear", "Clear", show=True),
        Binding("q", "quit", "Quit", show=True),
    ]

    TITLE = "Chunk Hunter Flight Deck"
    SUB_TITLE = "Chunk Density Console"

    def __init__(self, config: HuntConfig | None = None) -> None:
        super().__init__()
        self.hunt_config = config or HuntConfig()
        self.last_status = "idle"

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Container(id="main-container"):
            # Left panel - Stats & Controls
            with Vertical(id="left-panel"):
                yield Label("MISSION CONTROL", classes="section-title")
                yield StatsPanel()
                yield CurrentFileDisplay()
                yield Rule()
                with Vertical(id="path-inputs"):
                    yield Label("Input")
                    yield Input(str(self.hunt_config.input_dir), id="input-path")
                    yield Label("Chunks")
                    yield Input(str(self.hunt_config.chunks_file), id="chunks-path")
                    yield Label("Output")
                    yield Input(str(self.hunt_config.output_dir), id="output-path")
                with Horizontal(id="action-buttons"):
                    yield Button("HUNT", id="hunt-btn", variant="success")
                    yield Button("Clear", id="clear-btn", variant="warning")

            # Center panel - Document results
            with Vertical(id="center-panel"):
                yield Label("DOCUMENTS", classes="section-title")
                yield ProgressBar(id="progress-bar", show_eta=False)
                yield FileLogTable(id="file-log")
                yield Rule()
                yield Label("SYSTEM LOG", classes="section-title")
                yield Log(id="log-panel", highlight=True, auto_scroll=True)

            # Right panel - Directory browser
            with Vertical(id="right-panel"):
                yield Label("FILE BROWSER", classes="section-title")
                yield DirectoryTree(Path.cwd(), id="dir-tree")

        yield Footer()

    def on_mount(self) -> None:
        self._log("Flight Deck initialized")
        self._log("Check the paths and press HUNT to begin")

    def _log(self, message: str) -> None:
        """Add a message to the system log."""
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.query_one("#log-panel", Log).write_line(f"[{timestamp}] {message}")

    # Message handlers for thread-safe updates
    def on_flight_deck_stats_updated(self, event: StatsUpdated) -> None:
        stats = event.stats
        self.last_status = stats.status
        self.query_one(StatsPanel).update_display(stats)
        self.query_one(CurrentFileDisplay).update_file(stats.current_file)
        if stats.files_discovered > 0:
            self.query_one("#progress-bar", ProgressBar).update(
                total=stats.files_discovered, progress=stats.files_processed
            )

    def on_flight_deck_log_message(self, event: LogMessage) -> None:
        self._log(event.message)

    def on_flight_deck_file_processed(self, event: FileProcessed) -> None:
        self.query_one("#file-log", FileLogTable).add_file(
            event.path, event.matches, event.chunkwords, event.density, event.written
        )

    def on_directory_tree_directory_selected(
        self, event: DirectoryTree.DirectorySelected
    ) -> None:
        """Use a selected folder as the input folder."""
        self.query_one("#input-path", Input).value = str(event.path)

    def on_directory_tree_file_selected(
        self, event: DirectoryTree.FileSelected
    ) -> None:
        """Use a selected .zip as input, any other file as the dictionary."""
        target = "#input-path" if event.path.suffix.lower() == ".zip" else "#chunks-path"
        self.query_one(target, Input).value = str(event.path)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "hunt-btn":
            self.action_hunt()
        elif event.button.id == "clear-btn":
            self.action_clear()

    def action_clear(self) -> None:
        """Clear the log and reset stats."""
        self.query_one(StatsPanel).update_display(HuntStats())
        self.query_one(CurrentFileDisplay).update_file("")
        self.query_one("#file-log", FileLogTable).clear()
        self.query_one("#log-panel", Log).clear()
        self.query_one("#progress-bar", ProgressBar).update(progress=0)
        self._log("Cleared - ready for new run")

    def action_hunt(self) -> None:
        """Start a hunt with the paths currently entered."""
        values = [
            self.query_one(f"#{name}-path", Input).value.strip()
            for name in ("input", "chunks", "output")
        ]
        if not all(values):
            self._log("[red]ERROR: Input, chunks and output paths are required[/]")
            return
        input_dir, chunks_file, output_dir = values
        self.hunt_config = HuntConfig(
            input_dir=Path(input_dir),
            chunks_file=Path(chunks_file),
            output_dir=Path(output_dir),
        )
        self.run_hunt(self.hunt_config)

    @work(exclusive=True, thread=True)
    def run_hunt(self, config: HuntConfig) -> None:
        """Run the hunt in a background thread."""
        stats = HuntStats(status="loading", start_time=datetime.now())
        self.post_message(self.StatsUpdated(stats.copy()))
        self.post_message(self.LogMessage(f"Loading chunks: {config.chunks_file}"))

        chunk_hunt = ChunkHunt(config)
        try:
            chunk_hunt.prepare()
        except HuntError as e:
            stats.status = "error"
            stats.end_time = datetime.now()
            self.post_message(self.StatsUpdated(stats.copy()))
            self.post_message(self.LogMessage(f"[red]ERROR: {e}[/]"))
            return

        stats.chunks_loaded = len(chunk_hunt.dictionary or ())
        stats.files_discovered = len(chunk_hunt.documents)
        stats.status = "running"
        self.post_message(self.StatsUpdated(stats.copy()))
        self.post_message(
            self.LogMessage(
                f"{stats.chunks_loaded} chunks, {stats.files_discovered} files "
                f"({chunk_hunt.ingester.source_type if chunk_hunt.ingester else '?'})"
            )
        )

        for outcome in chunk_hunt.run():
            report = outcome.report
            stats.current_file = report.document.path
            stats.files_processed += 1
            stats.matches += len(report.records)
            stats.chunkwords += report.stats.chunkwords
            stats.words += report.stats.words
            if not report.document.readable:
                stats.unreadable_files += 1
                self.post_message(
                    self.LogMessage(f"[yellow]Unreadable: {report.document.path}[/]")
                )
            if not outcome.written:
                stats.failed_writes += 1
                self.post_message(
                    self.LogMessage(f"[red]Write failed: {report.document.path}[/]")
                )

            self.post_message(self.StatsUpdated(stats.copy()))
            self.post_message(
                self.FileProcessed(
                    report.document.path,
                    len(report.records),
                    report.stats.chunkwords,
                    report.stats.percentage_text,
                    outcome.written,
                )
            )

        stats.status = "complete"
        stats.current_file = ""
        stats.end_time = datetime.now()
        self.post_message(self.StatsUpdated(stats.copy()))
        self.post_message(
            self.LogMessage(
                f"[cyan]COMPLETE: {stats.files_processed} files, "
                f"{stats.density} chunk density -> {config.output_dir}[/]"
            )
        )


def main() -> None:
    """Run the Flight Deck TUI."""
    app = FlightDeck()
    app.run()


if __name__ == "__main__":
    main()
