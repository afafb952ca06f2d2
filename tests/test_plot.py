import random

import pytest

from plot.bar_chart import plot_bar_chart
from plot.bump_chart import compute_ranks, get_marker_by_count, marker_label, plot_bump_chart, prepare_time_dfs
from plot.word_cloud import (
    MAX_FONT_SIZE,
    MIN_FONT_SIZE,
    font_size_for,
    plot_word_cloud,
    random_position,
    text_extent,
)

SNAPSHOTS = [
    [("apple", 3), ("banana", 2), ("cherry", 1)],
    [("banana", 3), ("apple", 2)],
    [("cherry", 4), ("banana", 1)],
]


def test_ranks_follow_counts():
    ranks = compute_ranks(prepare_time_dfs(SNAPSHOTS, top_k=3))

    assert list(ranks.columns) == ["time_0", "time_1", "time_2"]
    assert ranks.loc["apple", "time_0"] == 1
    assert ranks.loc["banana", "time_1"] == 1
    assert ranks.loc["cherry", "time_2"] == 1
    assert ranks["time_1"].isna()["cherry"]


def test_tied_words_keep_their_update_order():
    snapshots = [[("zed", 3), ("abe", 1)], [("abe", 3), ("zed", 3)]]
    ranks = compute_ranks(prepare_time_dfs(snapshots, top_k=2))

    assert ranks.loc["zed", "time_0"] == 1
    assert ranks.loc["abe", "time_0"] == 2
    assert ranks.loc["abe", "time_1"] == 1
    assert ranks.loc["zed", "time_1"] == 2


def test_prepare_time_dfs_respects_top_k():
    time_dfs = prepare_time_dfs(SNAPSHOTS, top_k=1)
    assert [list(df.index) for df in time_dfs] == [["apple"], ["banana"], ["cherry"]]


def test_marker_by_count():
    assert get_marker_by_count(1) == 'o'
    assert get_marker_by_count(7) == '*'
    assert marker_label(1) == "Ranked once"
    assert marker_label(2) == "Ranked in 2 updates"
    assert marker_label(5) == "Ranked in 5 updates or more"


@pytest.mark.parametrize(
    "count, max_count, expected",
    [(10, 10, MAX_FONT_SIZE), (0, 10, MIN_FONT_SIZE), (5, 10, 30), (3, 0, MIN_FONT_SIZE)],
)
def test_font_size_for(count, max_count, expected):
    assert font_size_for(count, max_count) == expected


def test_charts_are_written(tmp_path):
    plot_bar_chart(SNAPSHOTS[0], tmp_path / "bar.png")
    plot_word_cloud(SNAPSHOTS[0], tmp_path / "cloud.png", seed=3)
    plot_bump_chart(SNAPSHOTS, tmp_path / "bump.png", top_k=3)

    for name in ["bar.png", "cloud.png", "bump.png"]:
        assert (tmp_path / name).stat().st_size > 0


def test_empty_snapshot_charts(tmp_path):
    plot_bar_chart([], tmp_path / "bar.png")
    plot_word_cloud([], tmp_path / "cloud.png")

    assert (tmp_path / "bar.png").exists()
    assert (tmp_path / "cloud.png").exists()


@pytest.mark.parametrize("word", ["fig", "elderberry", "comprehensive"])
def test_words_stay_inside_the_image(word):
    rng = random.Random(0)
    width, height = text_extent(word, MAX_FONT_SIZE)
    for _ in range(200):
        x, y = random_position(rng, word, MAX_FONT_SIZE)
        assert 0.0 <= x <= 1.0 - width
        assert 0.0 <= y <= 1.0 - height


def test_word_wider_than_the_image_starts_at_left_edge():
    word = "x" * 100
    assert text_extent(word, MAX_FONT_SIZE)[0] > 1.0
    x, _ = random_position(random.Random(1), word, MAX_FONT_SIZE)
    assert x == 0.0
