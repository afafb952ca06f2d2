import random

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

MIN_FONT_SIZE = 12
MAX_FONT_SIZE = 48
FIG_WIDTH, FIG_HEIGHT = 8, 6  # inches
CHAR_WIDTH = 0.6  # average bold glyph width, as a fraction of the font size


def font_size_for(count, max_count):
    """Scale a word's font size linearly with its count relative to the most frequent word."""
    if max_count <= 0:
        return MIN_FONT_SIZE
    return MIN_FONT_SIZE + int((MAX_FONT_SIZE - MIN_FONT_SIZE) * (count / max_count))


def text_extent(word, font_size):
    """Approximate (width, height) of a drawn word, as fractions of the figure."""
    width = CHAR_WIDTH * font_size * len(word) / (FIG_WIDTH * 72)
    height = font_size / (FIG_HEIGHT * 72)
    return width, height


def random_position(rng, word, font_size):
    """Pick a lower-left corner that keeps the whole word inside the image when it fits."""
    width, height = text_extent(word, font_size)
    x = rng.uniform(0.0, max(0.0, 1.0 - width))
    y = rng.uniform(0.0, max(0.0, 1.0 - height))
    return x, y


def plot_word_cloud(words, path, seed=None):
    """
    Save a simple word cloud of (word, count) pairs to path: every word is drawn
    once at a random position and in a random colour, sized by its count.
    Passing a seed makes the layout reproducible.
    """
    rng = random.Random(seed)
    max_count = max((count for _, count in words), default=1)

    fig = plt.figure(figsize=(FIG_WIDTH, FIG_HEIGHT))
    fig.patch.set_facecolor((230 / 255, 240 / 255, 1.0))  # light blue background
    ax = fig.add_axes([0, 0, 1, 1])
    ax.set_axis_off()
    ax.set_xlim(0, 1)
    ax.set_ylim(0, 1)
    # Border around the image
    fig.add_artist(Rectangle((0, 0), 1, 1, transform=fig.transFigure, fill=False, edgecolor='black'))

    for word, count in words:
        font_size = font_size_for(count, max_count)
        x, y = random_position(rng, word, font_size)
        ax.text(
            x, y, word,
            fontsize=font_size,
            fontweight='bold',
            va='bottom',
            color=(rng.random(), rng.random(), rng.random()),
        )

    fig.savefig(path, facecolor=fig.get_facecolor())
    plt.close(fig)
