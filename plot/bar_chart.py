import matplotlib.pyplot as plt


def plot_bar_chart(words, path, title="Word Frequency"):
    """Save a bar chart of (word, count) pairs, most frequent first, to path."""
    labels = [word for word, _ in words]
    counts = [count for _, count in words]
    fig, ax = plt.subplots(figsize=(8, 6))
    ax.bar(range(len(labels)), counts, color=plt.cm.tab20.colors[0])
    ax.set_xticks(range(len(labels)))
    ax.set_xticklabels(labels, rotation=45, ha='right')
    ax.set_title(title)
    ax.set_xlabel("Words")
    ax.set_ylabel("Frequency")
    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)
