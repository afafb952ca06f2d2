from dataclasses import dataclass, field
from typing import FrozenSet

from streaming.algorithms.sliding_window import SlidingWindowFrequencyTracker
from streaming.errors import ConfigurationError

EAGER = "eager"
STRICT = "strict"
CADENCES = (EAGER, STRICT)


@dataclass(frozen=True)
class WordCloudConfig:
    """
    Parameters of a word cloud run.

    cadence decides when update steps start counting:
      - "eager": every accepted token is a step, updates fire once the window is full
      - "strict": only tokens inserted while the window is full are steps
    """

    cloud_size: int = 10
    min_length: int = 6
    window_size: int = 1000
    min_frequency: int = 1
    update_frequency: int = 1
    ignore: FrozenSet[str] = field(default_factory=frozenset)
    cadence: str = EAGER

    def __post_init__(self) -> None:
        if self.cloud_size < 1:
            raise ConfigurationError("cloud_size must be positive")
        if self.window_size < 1:
            raise ConfigurationError("window_size must be positive")
        if self.min_length < 0:
            raise ConfigurationError("min_length must be non-negative")
        if self.min_frequency < 1:
            raise ConfigurationError("min_frequency must be at least 1")
        if self.update_frequency < 1:
            raise ConfigurationError("update_frequency must be positive")
        if self.cadence not in CADENCES:
            raise ConfigurationError(f"cadence must be one of {', '.join(CADENCES)}")
        # Accept any iterable of words but store a normalized frozenset.
        object.__setattr__(self, "ignore", frozenset(w.lower() for w in self.ignore))

    def tracker(self) -> SlidingWindowFrequencyTracker:
        return SlidingWindowFrequencyTracker(
            cloud_size=self.cloud_size,
            min_length=self.min_length,
            window_size=self.window_size,
            ignore=self.ignore,
            min_frequency=self.min_frequency,
        )

    def describe(self) -> str:
        return (
            f"cloud_size={self.cloud_size} min_length={self.min_length} "
            f"window_size={self.window_size} update_frequency={self.update_frequency} "
            f"min_frequency={self.min_frequency} cadence={self.cadence} ignored={len(self.ignore)}"
        )
