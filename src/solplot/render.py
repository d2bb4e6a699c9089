"""Chart rendering with matplotlib.

The output format is taken from the file extension: ``png`` is drawn with
the raster (Agg) backend, ``svg`` with the vector backend.
"""

from enum import Enum
from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.ticker import MaxNLocator

from .config import RenderConfig
from .errors import InputOutputError, MissingFormatError, RenderError, UnknownExtensionError
from .geometry import PlotGeometry

DPI = 100
# Space reserved next to the plot area for tick labels, in pixels
X_LABEL_AREA = 20
Y_LABEL_AREA = 40
TICK_COUNT = 5
# Points are drawn as circles, scatter sizes are in typographic points
POINTS_PER_INCH = 72


class OutputFormat(Enum):
    """Image formats understood from the output file extension."""

    PNG = "png"
    SVG = "svg"

    @property
    def is_raster(self) -> bool:
        return self is OutputFormat.PNG

    @classmethod
    def from_path(cls, path: Path | str) -> "OutputFormat":
        """Resolve the output format from a file extension (case-sensitive).

        Raises:
            MissingFormatError: If the path has no extension.
            UnknownExtensionError: If the extension is neither png nor svg.
        """
        suffix = Path(path).suffix
        if not suffix:
            raise MissingFormatError(str(path))
        extension = suffix[1:]
        try:
            return cls(extension)
        except ValueError:
            raise UnknownExtensionError(extension) from None


def marker_size(radius: float, dpi: int = DPI) -> float:
    """Convert a point radius in pixels to a matplotlib scatter size."""
    diameter_pt = 2 * radius * POINTS_PER_INCH / dpi
    return diameter_pt**2


def scatter_status(
    geometry: PlotGeometry,
    output: Path | str,
    config: RenderConfig,
    output_format: OutputFormat | None = None,
) -> OutputFormat:
    """Render scatter geometry to an image file.

    Args:
        geometry: Points and axis bounds from build_geometry.
        output: Destination image path.
        config: Render configuration supplying the image size.
        output_format: Already resolved format, inferred from output if None.

    Returns:
        The format the image was written in.

    Raises:
        FormatError: If the output extension is not supported.
        InputOutputError: If the image cannot be written.
        RenderError: If matplotlib fails to draw the chart.
    """
    output = Path(output)
    if output_format is None:
        output_format = OutputFormat.from_path(output)

    fig = None
    try:
        fig = _build_figure(geometry, config)
        fig.savefig(output, format=output_format.value, dpi=DPI, facecolor="white")
    except OSError as e:
        raise InputOutputError(e, output) from e
    except (ValueError, RuntimeError, ZeroDivisionError) as e:
        raise RenderError(str(e)) from e
    finally:
        if fig is not None:
            plt.close(fig)

    return output_format


def _build_figure(geometry: PlotGeometry, config: RenderConfig) -> Figure:
    """Lay out the plot area and draw the points."""
    width, height = config.size
    if width <= 0 or height <= 0:
        raise ValueError(f"Invalid image size {width}x{height}")

    fig, ax = plt.subplots(figsize=(width / DPI, height / DPI), dpi=DPI)
    try:
        # Margin on every side, plus label areas on the left and bottom
        margin = geometry.margin
        fig.subplots_adjust(
            left=(margin + Y_LABEL_AREA) / width,
            right=1 - margin / width,
            bottom=(margin + X_LABEL_AREA) / height,
            top=1 - margin / height,
        )
        _configure_axes(ax, geometry)

        ax.scatter(
            geometry.xs,
            geometry.ys,
            s=marker_size(geometry.radius),
            c=geometry.colors,
            linewidths=0,
        )
    except Exception:
        plt.close(fig)
        raise
    return fig


def _configure_axes(ax: Axes, geometry: PlotGeometry) -> None:
    ax.set_xlim(*geometry.x_range)
    ax.set_ylim(*geometry.y_range)
    ax.xaxis.set_major_locator(MaxNLocator(nbins=TICK_COUNT))
    ax.yaxis.set_major_locator(MaxNLocator(nbins=TICK_COUNT))
    ax.grid(True, alpha=0.3)
