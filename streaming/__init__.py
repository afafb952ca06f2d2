"""
Sliding window word frequency streaming.

This package provides:
- algorithms: the sliding window frequency tracker
- utils: tokenization and word filtering
- sinks: printing and chart outputs for word cloud updates
- streaming_pipeline: orchestration for processing text streams
"""

from .config import WordCloudConfig
from .errors import ConfigurationError, IgnoreListIOError, OutputSinkError, TopWordsError
from .streaming_pipeline import StreamingPipeline

__all__ = [
    "StreamingPipeline",
    "WordCloudConfig",
    "TopWordsError",
    "ConfigurationError",
    "IgnoreListIOError",
    "OutputSinkError",
]
