"""Scatter charts of solver run status logs."""

from .config import RenderConfig
from .errors import (
    ConfigError,
    FloatParseError,
    FormatError,
    InputOutputError,
    IntParseError,
    MissingFormatError,
    MissingTokenError,
    ParseError,
    RenderError,
    SolplotError,
    UnknownExtensionError,
    UnknownStatusError,
)
from .geometry import HEADROOM, PlotGeometry, ScatterPoint, build_geometry, status_color
from .loader import load_status_file, parse_log
from .render import OutputFormat, scatter_status
from .source import InputSource
from .status import Status, StatusValue, parse_record

__all__ = [
    "Status",
    "StatusValue",
    "parse_record",
    "parse_log",
    "load_status_file",
    "InputSource",
    "RenderConfig",
    "PlotGeometry",
    "ScatterPoint",
    "build_geometry",
    "status_color",
    "HEADROOM",
    "OutputFormat",
    "scatter_status",
    "SolplotError",
    "ParseError",
    "MissingTokenError",
    "FloatParseError",
    "IntParseError",
    "UnknownStatusError",
    "InputOutputError",
    "FormatError",
    "MissingFormatError",
    "UnknownExtensionError",
    "RenderError",
    "ConfigError",
]
