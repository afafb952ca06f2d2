import json
import logging
import sys
from typing import List, Optional, TextIO

from streaming.algorithms.sliding_window import Snapshot
from streaming.errors import OutputSinkError

logger = logging.getLogger(__name__)

TEXT = "text"
JSON = "json"
FORMATS = (TEXT, JSON)


def format_snapshot(snapshot: Snapshot) -> str:
    """Render a snapshot as space separated `word: count` pairs."""
    return " ".join(f"{word}: {count}" for word, count in snapshot)


class OutputSink:
    """Receives one snapshot per update. Subclasses override __call__ and optionally close."""

    def __call__(self, snapshot: Snapshot) -> None:
        raise NotImplementedError

    def close(self) -> None:
        pass


class PrintSink(OutputSink):
    """Writes one line per update, either plain `word: count` pairs or a JSON object."""

    def __init__(self, stream: Optional[TextIO] = None, fmt: str = TEXT) -> None:
        if fmt not in FORMATS:
            raise ValueError(f"fmt must be one of {', '.join(FORMATS)}")
        self._stream = stream
        self.fmt = fmt
        self.updates = 0

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so that a replaced sys.stdout is honoured.
        return self._stream if self._stream is not None else sys.stdout

    def __call__(self, snapshot: Snapshot) -> None:
        self.updates += 1
        if self.fmt == JSON:
            line = json.dumps(
                {"update": self.updates, "words": [[word, count] for word, count in snapshot]},
                ensure_ascii=False,
            )
        else:
            line = format_snapshot(snapshot)
        try:
            self.stream.write(line + "\n")
            self.stream.flush()
        except BrokenPipeError as e:
            raise OutputSinkError("output stream closed by the reader") from e


class BarChartSink(OutputSink):
    """Re-renders a bar chart PNG of the current cloud on every update."""

    def __init__(self, path: str) -> None:
        self.path = path

    def __call__(self, snapshot: Snapshot) -> None:
        from plot.bar_chart import plot_bar_chart

        plot_bar_chart(snapshot, self.path)
        logger.debug("Bar chart written to %s", self.path)


class WordCloudSink(OutputSink):
    """Re-renders a word cloud PNG of the current cloud on every update."""

    def __init__(self, path: str, seed: Optional[int] = None) -> None:
        self.path = path
        self.seed = seed

    def __call__(self, snapshot: Snapshot) -> None:
        from plot.word_cloud import plot_word_cloud

        plot_word_cloud(snapshot, self.path, seed=self.seed)
        logger.debug("Word cloud written to %s", self.path)


class HistorySink(OutputSink):
    """
    Keeps every snapshot in memory. On close, draws a rank history chart
    if a path was given and at least one update was seen.
    """

    def __init__(self, path: Optional[str] = None, top_k: int = 10) -> None:
        self.path = path
        self.top_k = top_k
        self.snapshots: List[Snapshot] = []

    def __call__(self, snapshot: Snapshot) -> None:
        self.snapshots.append(list(snapshot))

    @property
    def latest(self) -> Snapshot:
        return self.snapshots[-1] if self.snapshots else []

    def close(self) -> None:
        if not self.path:
            return
        if not self.snapshots:
            logger.warning("No updates were emitted; skipping history chart %s", self.path)
            return
        from plot.bump_chart import plot_bump_chart

        plot_bump_chart(self.snapshots, self.path, top_k=self.top_k)
        logger.debug("History chart written to %s", self.path)
