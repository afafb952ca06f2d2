"""Tests for streaming.sinks."""

import io
import json

import pytest

from streaming.errors import OutputSinkError
from streaming.sinks import (
    BarChartSink,
    HistorySink,
    PrintSink,
    WordCloudSink,
    format_snapshot,
)


class BrokenStream(io.StringIO):
    def write(self, s):
        raise BrokenPipeError(32, "Broken pipe")


class TestPrintSink:
    """Tests for the stdout sink."""

    def test_format_snapshot(self):
        assert format_snapshot([("apple", 3), ("banana", 2)]) == "apple: 3 banana: 2"
        assert format_snapshot([]) == ""

    def test_text_output_one_line_per_update(self):
        stream = io.StringIO()
        sink = PrintSink(stream)
        sink([("apple", 3), ("banana", 2)])
        sink([("banana", 2)])

        assert stream.getvalue() == "apple: 3 banana: 2\nbanana: 2\n"
        assert sink.updates == 2

    def test_json_output(self):
        stream = io.StringIO()
        sink = PrintSink(stream, fmt="json")
        sink([("naïve", 2)])
        sink([])

        lines = [json.loads(line) for line in stream.getvalue().splitlines()]
        assert lines == [
            {"update": 1, "words": [["naïve", 2]]},
            {"update": 2, "words": []},
        ]

    def test_defaults_to_current_stdout(self, capsys):
        PrintSink()([("hello", 1)])
        assert capsys.readouterr().out == "hello: 1\n"

    def test_broken_pipe_becomes_output_sink_error(self):
        sink = PrintSink(BrokenStream())
        with pytest.raises(OutputSinkError):
            sink([("hello", 1)])

    def test_unknown_format(self):
        with pytest.raises(ValueError):
            PrintSink(io.StringIO(), fmt="xml")


class TestImageSinks:
    """Chart sinks write PNG files."""

    def test_bar_chart_sink(self, tmp_path):
        path = tmp_path / "bars.png"
        BarChartSink(str(path))([("apple", 3), ("banana", 2)])
        assert path.read_bytes().startswith(b"\x89PNG")

    def test_word_cloud_sink(self, tmp_path):
        path = tmp_path / "cloud.png"
        WordCloudSink(str(path), seed=1)([("apple", 3), ("banana", 2), ("cherry", 1)])
        assert path.read_bytes().startswith(b"\x89PNG")

    def test_history_sink_draws_on_close(self, tmp_path):
        path = tmp_path / "history.png"
        sink = HistorySink(str(path), top_k=3)
        sink([("apple", 3), ("banana", 2)])
        sink([("banana", 3), ("apple", 2), ("cherry", 1)])
        sink([("cherry", 2)])
        assert not path.exists()

        sink.close()
        assert path.read_bytes().startswith(b"\x89PNG")

    def test_history_sink_without_updates_writes_nothing(self, tmp_path):
        path = tmp_path / "history.png"
        HistorySink(str(path)).close()
        assert not path.exists()

    def test_history_sink_copies_snapshots(self):
        sink = HistorySink()
        snapshot = [("apple", 1)]
        sink(snapshot)
        snapshot.append(("banana", 1))

        assert sink.latest == [("apple", 1)]
        sink.close()
