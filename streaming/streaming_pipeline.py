import logging
from typing import Iterable, List, Optional, Sequence

from streaming.algorithms.sliding_window import SlidingWindowFrequencyTracker, Snapshot
from streaming.config import STRICT, WordCloudConfig
from streaming.sinks import OutputSink
from streaming.utils.token_handler import filter_tokens

logger = logging.getLogger(__name__)


class StreamingPipeline:
    """
    Feeds lines of text through the tokenizer into a sliding window tracker
    and hands a top words snapshot to every sink each time an update is due.

    A step is one accepted token. An update fires once the window is full and
    at least `update_frequency` steps have passed since the previous update.
    """

    def __init__(
        self,
        config: Optional[WordCloudConfig] = None,
        sinks: Sequence[OutputSink] = (),
        tracker: Optional[SlidingWindowFrequencyTracker] = None,
    ) -> None:
        self.config = config or WordCloudConfig()
        self.tracker = tracker or self.config.tracker()
        self.sinks: List[OutputSink] = list(sinks)

        self._steps = 0
        self._accepted = 0
        self._updates = 0

    def process_line(self, line: str) -> List[Snapshot]:
        """
        Process a single line of text.
        Returns the snapshots emitted while processing it (usually zero or one).
        """
        emitted = []
        for token in filter_tokens(line, self.tracker.min_length, self.tracker.ignore):
            if not self.tracker.insert(token):
                continue
            self._accepted += 1

            if self.config.cadence == STRICT and not self.tracker.is_full():
                continue
            self._steps += 1

            if self.tracker.is_full() and self._steps >= self.config.update_frequency:
                snapshot = self.tracker.top_k()
                self.emit(snapshot)
                emitted.append(snapshot)
                self._steps = 0
        return emitted

    def process_lines(self, lines: Iterable[str]) -> int:
        """Process every line and return the number of accepted tokens."""
        for line in lines:
            self.process_line(line)
        logger.info(
            "Processed %d tokens, emitted %d updates (window %d/%d)",
            self._accepted, self._updates, len(self.tracker), self.tracker.window_size,
        )
        return self._accepted

    def emit(self, snapshot: Snapshot) -> None:
        self._updates += 1
        for sink in self.sinks:
            sink(snapshot)

    def close(self) -> None:
        for sink in self.sinks:
            sink.close()

    @property
    def accepted(self) -> int:
        return self._accepted

    @property
    def updates(self) -> int:
        return self._updates

    def __repr__(self) -> str:
        return (
            f"StreamingPipeline("
            f"tracker={self.tracker}, "
            f"sinks={len(self.sinks)}, "
            f"updates={self._updates})"
        )
