# region Imports
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Patch
from matplotlib.lines import Line2D
from redmart.grid import Grid
from redmart.solver import cell_table
# endregion

# region Visualization Function
def show_length_heatmap(grid: Grid, table=None, title="Longest descending run per cell"):
    """
    Render elevations with the per-cell run length overlaid and the best
    start cells marked. Returns the figure; call plt.show() or savefig() on it.
    """
    if table is None:
        table = cell_table(grid)
    H, W = grid.shape
    elev = grid.as_array()

    fig, ax = plt.subplots(figsize=(8, 8))
    ax.imshow(elev, origin="upper", cmap="terrain", alpha=0.9)

    # region Length Overlay
    lengths = table.length.astype(np.float32)
    best_length = lengths.max()
    heat = ax.imshow(lengths / max(1.0, best_length), origin="upper", cmap="viridis", alpha=0.6)
    cbar = fig.colorbar(heat, ax=ax, fraction=0.046, pad=0.04)
    cbar.set_label(f"run length (1 → {int(best_length)})")
    # endregion

    # region Best Starts
    longest = table.length == table.length.max()
    best_drop = table.drop[longest].max()
    rs, cs = np.nonzero(longest & (table.drop == best_drop))
    ax.scatter(cs, rs, s=100, edgecolors="black", facecolors="white", zorder=3)
    # endregion

    # region Legend / Layout
    legend_elements = [
        Line2D([0], [0], marker="o", color="w", label="Best start",
               markerfacecolor="white", markeredgecolor="black", markersize=9),
        Patch(facecolor="purple", label="Short run"),
        Patch(facecolor="yellow", label="Long run"),
    ]
    ax.legend(handles=legend_elements, loc="lower right", fontsize=8, framealpha=0.85)
    ax.set_title(title)
    ax.set_xlim(-0.5, W - 0.5)
    ax.set_ylim(H - 0.5, -0.5)
    ax.set_axis_off()
    fig.tight_layout()
    return fig
    # endregion
# endregion
