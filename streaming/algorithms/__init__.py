from .sliding_window import SlidingWindowFrequencyTracker, Snapshot

__all__ = ["SlidingWindowFrequencyTracker", "Snapshot"]
