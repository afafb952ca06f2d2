import itertools

import matplotlib.pyplot as plt
import pandas as pd
from matplotlib.lines import Line2D

# Marker per number of updates a word was ranked in; 5 or more share the star.
MARKERS = {1: 'o', 2: 's', 3: 'D', 4: '^', 5: '*'}


def prepare_time_dfs(snapshots, top_k=10):
    """
    One single-column frame per update: word -> rank. Snapshots are already
    ordered (count descending, ties by word), so a word's rank is its position.
    """
    time_dfs = []
    for i, snapshot in enumerate(snapshots):
        ranked = [(word, position) for position, (word, _) in enumerate(snapshot[:top_k], start=1)]
        df = pd.DataFrame(ranked, columns=["term", f"time_{i}"]).set_index("term")
        time_dfs.append(df)
    return time_dfs


def compute_ranks(time_dfs):
    """Align the per-update ranks into a words x updates frame; NaN where a word was not ranked."""
    return pd.concat(time_dfs, axis=1, sort=False).astype(float)


def plot_segments(ranks, ax, top_k=10):
    unique_terms = ranks.index.tolist()
    color_map = {term: c for term, c in zip(unique_terms, itertools.cycle(plt.cm.tab20.colors))}
    col_name_to_idx = {col: idx for idx, col in enumerate(ranks.columns)}

    for term in ranks.index:
        vals = ranks.loc[term]
        valid = vals.notna() & (vals <= top_k)
        if not valid.any():
            continue
        color = color_map[term]
        segment_x, segment_y = [], []
        marker = get_marker_by_count(int(vals.count()))
        for col_name, v in zip(vals.index, vals):
            if valid[col_name]:
                segment_x.append(col_name_to_idx[col_name])
                segment_y.append(v)
            else:
                if segment_x:
                    ax.plot(segment_x, segment_y, marker=marker, linewidth=2, color=color)
                    add_labels(ax, segment_x, segment_y, term)
                    segment_x, segment_y = [], []
        if segment_x:
            ax.plot(segment_x, segment_y, marker=marker, linewidth=2, color=color)
            add_labels(ax, segment_x, segment_y, term)


def add_labels(ax, segment_x, segment_y, term):
    """Label a segment at both ends (once when it covers a single update)."""
    ends = {segment_x[0]: segment_y[0], segment_x[-1]: segment_y[-1]}
    for x, y in ends.items():
        ax.text(x, y - 0.05, term, ha='center', va='bottom', fontsize=7)


def get_marker_by_count(count):
    """Return a marker symbol based on the number of updates a word was ranked in."""
    return MARKERS[min(max(count, 1), max(MARKERS))]


def marker_label(count):
    label = "Ranked once" if count == 1 else f"Ranked in {count} updates"
    return label + " or more" if count == max(MARKERS) else label


def add_legend_for_markers(ax):
    """Add a horizontal legend below the plot explaining marker shapes."""
    legend_elements = [
        Line2D([0], [0], marker=marker, color='black', linestyle='None', label=marker_label(count))
        for count, marker in MARKERS.items()
    ]
    ax.legend(handles=legend_elements, loc='upper center', bbox_to_anchor=(0.5, -0.15),
              ncol=len(MARKERS), fontsize=8, frameon=False)


def plot_bump_chart(snapshots, path, top_k=10):
    """Draw how the rank of each top word evolves over successive updates and save it to path."""
    time_dfs = prepare_time_dfs(snapshots, top_k=top_k)
    ranks = compute_ranks(time_dfs)
    fig, ax = plt.subplots(figsize=(11, 6))
    plot_segments(ranks, ax, top_k=top_k)
    ax.invert_yaxis()
    ax.set_title(f"Sliding Top {top_k} Words Over Time")
    ax.set_xlabel("Update")
    ax.set_ylabel("Rank (1 = Most Frequent)")
    ax.set_xticks(range(len(snapshots)))
    ax.set_xticklabels([i + 1 for i in range(len(snapshots))])
    ax.set_yticks(range(1, top_k + 1))
    add_legend_for_markers(ax)
    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)
