# utils/visualize.py
import math
from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib.font_manager import FontProperties
from matplotlib.patches import PathPatch
from matplotlib.textpath import TextPath
from matplotlib.transforms import Affine2D

from utils.constants import ALPHABET_SIZE, FALLBACK_GLYPH, residue_color

_FONT = FontProperties(family="DejaVu Sans", weight="bold")


def _glyph(residue: str) -> str:
    return residue if len(residue) == 1 and residue.isalpha() else FALLBACK_GLYPH


def draw_letter(ax, residue: str, x: float, y: float, width: float, height: float, color: str):
    """Stretch a residue glyph to fill the box (x, y, width, height)."""
    path = TextPath((0, 0), _glyph(residue), size=1, prop=_FONT)
    bb = path.get_extents()
    t = (
        Affine2D()
        .translate(-bb.x0, -bb.y0)
        .scale(width / bb.width, height / bb.height)
        .translate(x, y)
    )
    patch = PathPatch(t.transform_path(path), facecolor=color, edgecolor="none")
    ax.add_patch(patch)
    return patch


def plot_sequence_logo(logo, out_png: str = "data/cache/logo.png", ax=None):
    """
    Draw a sequence logo from a SequenceLogo.
    Letters are stacked bottom to top by ascending count; gaps are not drawn.
    Returns the axes the logo was drawn on.
    """
    n_cols = len(logo.column_counts)
    ymax = logo.max_information_content
    if ymax <= 0:
        ymax = math.log2(ALPHABET_SIZE[logo.sequence_type])

    own_figure = ax is None
    if own_figure:
        fig, ax = plt.subplots(figsize=(max(6, n_cols // 3), 3))
    else:
        fig = ax.get_figure()

    for i, stack in enumerate(logo.stacks()):
        y = 0.0
        for residue, height in stack:
            if not math.isfinite(height) or height <= 0:
                continue
            draw_letter(
                ax,
                residue,
                x=i + 0.5,
                y=y,
                width=1.0,
                height=height,
                color=residue_color(logo.sequence_type, residue),
            )
            y += height

    ax.set_xlim(0.5, n_cols + 0.5)
    ax.set_ylim(0, ymax)
    ax.set_xticks(range(1, n_cols + 1))
    ax.tick_params(axis="x", labelsize=8)
    ax.set_xlabel("Position")
    ax.set_ylabel("Bits")
    ax.spines["right"].set_visible(False)
    ax.spines["top"].set_visible(False)

    if out_png:
        Path(out_png).parent.mkdir(parents=True, exist_ok=True)
        fig.tight_layout()
        fig.savefig(out_png, dpi=150)
        print(f"[Visualizer] Sequence logo saved to {out_png}")
    if own_figure:
        plt.close(fig)
    return ax
