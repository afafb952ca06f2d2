import logging
import os
import sys
from typing import Optional, TextIO

import click

from data_loader.ignore_list import load_ignore_list
from data_loader.line_source import iter_lines
from streaming.config import CADENCES, EAGER, WordCloudConfig
from streaming.errors import ConfigurationError, OutputSinkError
from streaming.sinks import FORMATS, TEXT, BarChartSink, HistorySink, PrintSink, WordCloudSink
from streaming.streaming_pipeline import StreamingPipeline

logger = logging.getLogger("topwords")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def build_pipeline(
        config: WordCloudConfig,
        output_format: str = TEXT,
        bar_chart: Optional[str] = None,
        word_cloud: Optional[str] = None,
        history_chart: Optional[str] = None,
        seed: Optional[int] = None,
        stream: Optional[TextIO] = None,
) -> StreamingPipeline:
    """Assemble the pipeline and its output sinks from the command line choices."""
    sinks = [PrintSink(stream=stream, fmt=output_format)]
    if bar_chart:
        sinks.append(BarChartSink(bar_chart))
    if word_cloud:
        sinks.append(WordCloudSink(word_cloud, seed=seed))
    if history_chart:
        sinks.append(HistorySink(history_chart, top_k=config.cloud_size))
    return StreamingPipeline(config, sinks=sinks)


def _exit_on_broken_pipe() -> None:
    # Python flushes stdout at exit; point it at devnull so that flush cannot fail again.
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError) as e:
        logger.debug("stdout has no file descriptor to redirect: %s", e)
    sys.exit(0)


@click.command(context_settings={"auto_envvar_prefix": "TOPWORDS", "help_option_names": ["-h", "--help"]})
@click.argument(
    "input_file",
    type=click.File("r", encoding="utf-8", errors="replace"),
    default="-",
)
@click.option(
    "-c", "--cloud-size",
    type=click.IntRange(min=1),
    default=10,
    show_default=True,
    help="Number of words in the word cloud.",
)
@click.option(
    "-l", "--length-at-least",
    "min_length",
    type=click.IntRange(min=0),
    default=6,
    show_default=True,
    help="Minimum length of words to consider.",
)
@click.option(
    "-w", "--window-size",
    type=click.IntRange(min=1),
    default=1000,
    show_default=True,
    help="Size of the moving window of most recent words.",
)
@click.option(
    "-u", "--update-frequency",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Number of accepted words between word cloud updates.",
)
@click.option(
    "-f", "--min-frequency",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Minimum frequency for a word to be included in the cloud.",
)
@click.option(
    "-i", "--ignore-list", "--ignore-list-file",
    "ignore_list",
    type=click.Path(dir_okay=False, path_type=str),
    default=None,
    help="File with words to ignore, one per line.",
)
@click.option(
    "--cadence",
    type=click.Choice(CADENCES),
    default=EAGER,
    show_default=True,
    help="eager: count update steps from the first word; strict: only once the window is full.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(FORMATS),
    default=TEXT,
    show_default=True,
    help="Print updates as 'word: count' pairs or as JSON lines.",
)
@click.option(
    "--bar-chart",
    type=click.Path(dir_okay=False, writable=True, path_type=str),
    default=None,
    help="Write a bar chart PNG of the cloud on every update.",
)
@click.option(
    "--word-cloud",
    type=click.Path(dir_okay=False, writable=True, path_type=str),
    default=None,
    help="Write a word cloud PNG on every update.",
)
@click.option(
    "--history-chart",
    type=click.Path(dir_okay=False, writable=True, path_type=str),
    default=None,
    help="Write a chart of word ranks across all updates at the end of input.",
)
@click.option(
    "--seed",
    type=int,
    default=None,
    help="Random seed for the word cloud layout.",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging level for messages on stderr.",
)
def main(
        input_file: TextIO,
        cloud_size: int,
        min_length: int,
        window_size: int,
        update_frequency: int,
        min_frequency: int,
        ignore_list: Optional[str],
        cadence: str,
        output_format: str,
        bar_chart: Optional[str],
        word_cloud: Optional[str],
        history_chart: Optional[str],
        seed: Optional[int],
        log_level: str,
) -> None:
    """
    Read text from INPUT_FILE (default: stdin) and print the most frequent
    words among the last --window-size words, updated as the text streams in.
    """
    logging.basicConfig(
        stream=sys.stderr,
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    ignore = load_ignore_list(ignore_list) if ignore_list else frozenset()
    try:
        config = WordCloudConfig(
            cloud_size=cloud_size,
            min_length=min_length,
            window_size=window_size,
            min_frequency=min_frequency,
            update_frequency=update_frequency,
            ignore=ignore,
            cadence=cadence,
        )
    except ConfigurationError as e:
        raise click.UsageError(str(e)) from e
    logger.debug(config.describe())

    pipeline = build_pipeline(
        config,
        output_format=output_format,
        bar_chart=bar_chart,
        word_cloud=word_cloud,
        history_chart=history_chart,
        seed=seed,
    )

    try:
        pipeline.process_lines(iter_lines(input_file))
    except OutputSinkError as e:
        logger.debug("Stopping: %s", e)
        _exit_on_broken_pipe()
    pipeline.close()


if __name__ == "__main__":
    main()
