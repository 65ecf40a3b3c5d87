"""Simple crop visualization helpers for debugging."""

import matplotlib.pyplot as plt
from shapely.geometry import LineString, Point as ShapelyPoint, Polygon as ShapelyPolygon

from plotforge import CropMode, crop, to_shapely


def plot_crop(subject, frame, title: str = "Crop Comparison"):
    """Plot a subject against its frame, then both crop results side by side.

    Args:
        subject: Any plotforge shape crop accepts
        frame: Closed, positively oriented frame polygon
        title: Plot title
    """
    fig, (ax1, ax2, ax3) = plt.subplots(1, 3, figsize=(15, 5), sharex=True, sharey=True)

    # Inputs
    _plot_shape(ax1, frame, color='gray', alpha=0.2)
    _plot_shape(ax1, subject, color='red', alpha=0.5)
    ax1.set_title("Subject and frame")

    for ax, mode, color in ((ax2, CropMode.INCLUSIVE, 'blue'), (ax3, CropMode.EXCLUSIVE, 'green')):
        _plot_shape(ax, frame, color='gray', alpha=0.1)
        pieces = crop(subject, frame, mode)
        for piece in pieces:
            _plot_shape(ax, piece, color=color, alpha=0.5)
        ax.set_title(f"{mode.value} ({len(pieces)} pieces)")

    for ax in (ax1, ax2, ax3):
        ax.set_aspect('equal')
        ax.grid(True, alpha=0.3)

    fig.suptitle(title)
    plt.tight_layout()
    plt.show()


def _plot_shape(ax, shape, color='blue', alpha=0.5):
    """Plot a plotforge shape on the given axes.

    Args:
        ax: Matplotlib axes
        shape: Point, Segment or Polygon
        color: Fill / line color
        alpha: Transparency
    """
    geom = to_shapely(shape)
    if isinstance(geom, ShapelyPolygon):
        x, y = geom.exterior.xy
        ax.fill(x, y, color=color, alpha=alpha, edgecolor='black', linewidth=1.5)
        for interior in geom.interiors:
            x, y = interior.xy
            ax.fill(x, y, color='white', edgecolor='black', linewidth=1)
    elif isinstance(geom, LineString):
        x, y = geom.xy
        ax.plot(x, y, color=color, linewidth=2, marker='o', markersize=3)
    elif isinstance(geom, ShapelyPoint):
        ax.plot([geom.x], [geom.y], color=color, marker='o')
