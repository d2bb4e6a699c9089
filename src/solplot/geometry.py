"""Map status records to scatter chart geometry."""

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from .config import RenderConfig
from .status import Status, StatusValue

# Scale applied to the largest payload so the top points are not clipped
HEADROOM = 1.1
# Y bound used when no payload is positive, keeps the y range non-degenerate
MIN_Y_MAX = 1.0

STATUS_COLORS: dict[Status, str] = {
    Status.INFEASIBLE: "red",
    Status.LINEAR: "blue",
    Status.INTEGER: "green",
    Status.TIMEOUT: "black",
}


def status_color(status: Status) -> str:
    """Return the fill color used for points of the given status."""
    return STATUS_COLORS[status]


@dataclass(frozen=True)
class ScatterPoint:
    """A single filled point of the chart."""

    x: int
    y: float
    color: str


@dataclass(frozen=True)
class PlotGeometry:
    """Index-vs-value scatter geometry ready for rendering.

    The x axis spans ``0 .. x_max`` (one slot per record) and the y axis
    ``0 .. y_max``. ``radius`` and ``margin`` are copied from the render
    configuration unchanged.
    """

    points: tuple[ScatterPoint, ...]
    x_max: int
    y_max: float
    radius: int
    margin: int

    @property
    def x_range(self) -> tuple[int, int]:
        return (0, self.x_max)

    @property
    def y_range(self) -> tuple[float, float]:
        return (0.0, self.y_max)

    @property
    def xs(self) -> np.ndarray:
        return np.array([p.x for p in self.points], dtype=float)

    @property
    def ys(self) -> np.ndarray:
        return np.array([p.y for p in self.points], dtype=float)

    @property
    def colors(self) -> list[str]:
        return [p.color for p in self.points]

    def __len__(self) -> int:
        return len(self.points)


def build_geometry(records: Sequence[StatusValue], config: RenderConfig) -> PlotGeometry:
    """Convert parsed records into scatter points and axis bounds.

    Args:
        records: Parsed log records, in log order. Must not be empty.
        config: Render configuration supplying point radius and margin.

    Returns:
        PlotGeometry with one point per record, in the same order.

    Raises:
        ValueError: If records is empty, since no y bound can be derived.
    """
    if not records:
        raise ValueError("Cannot build plot geometry from an empty status log")

    y_max = max(record.value for record in records) * HEADROOM
    if y_max <= 0:
        y_max = MIN_Y_MAX

    points = tuple(
        ScatterPoint(x=index, y=record.value, color=status_color(record.status))
        for index, record in enumerate(records)
    )
    return PlotGeometry(
        points=points,
        x_max=len(records),
        y_max=y_max,
        radius=config.radius,
        margin=config.margin,
    )
