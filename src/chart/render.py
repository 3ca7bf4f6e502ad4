import logging
from pathlib import Path
from typing import List
from xml.etree import ElementTree as ET

import jinja2
from markupsafe import Markup
from pydantic import BaseModel, ConfigDict

from ..config import ChartConfig, TooltipConfig
from ..data.dataset import Dataset, dataset_description
from ..utils.format import js_number
from .axes import TICK_PADDING, TICK_SIZE, Axis, Legend, domain_path, legend, x_axis, y_axis
from .colors import ColorMapper
from .grid import Cell, build_cells
from .tooltip import format_tooltip_text

LOGGER = logging.getLogger(__name__)

_TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
)

SVG_NS = "http://www.w3.org/2000/svg"


class ChartLayout(BaseModel):
    """Everything needed to draw the chart; no markup yet."""

    model_config = ConfigDict(frozen=True)

    width: int
    height: int
    description: str
    cells: List[Cell]
    x_axis: Axis
    y_axis: Axis
    legend: Legend
    tooltip: TooltipConfig


def build_chart(dataset: Dataset, config: ChartConfig) -> ChartLayout:
    mapper = ColorMapper.from_dataset(dataset, config)
    layout = ChartLayout(
        width=config.width,
        height=config.height,
        description=dataset_description(dataset),
        cells=build_cells(dataset, mapper, config),
        x_axis=x_axis(dataset, config),
        y_axis=y_axis(config),
        legend=legend(mapper, config),
        tooltip=config.tooltip,
    )
    LOGGER.info(
        "Chart layout built: %d cells, %d year ticks, %d legend ticks",
        len(layout.cells),
        len(layout.x_axis.ticks),
        len(layout.legend.axis.ticks),
    )
    return layout


def _translate(x: float, y: float) -> str:
    return f"translate({js_number(x)}, {js_number(y)})"


def _axis_group(parent: ET.Element, axis: Axis) -> ET.Element:
    left = axis.orient == "left"
    g = ET.SubElement(
        parent,
        "g",
        {
            "id": axis.id,
            "transform": _translate(*axis.translate),
            "fill": "none",
            "font-size": "10",
            "font-family": "sans-serif",
            "text-anchor": "end" if left else "middle",
        },
    )
    ET.SubElement(g, "path", {"class": "domain", "stroke": "currentColor", "d": domain_path(axis)})
    offset = TICK_SIZE + TICK_PADDING
    for tick in axis.ticks:
        pos = tick.position
        tick_g = ET.SubElement(
            g,
            "g",
            {
                "class": "tick",
                "opacity": "1",
                "transform": _translate(0, pos) if left else _translate(pos, 0),
            },
        )
        if left:
            ET.SubElement(tick_g, "line", {"stroke": "currentColor", "x2": f"-{TICK_SIZE}"})
            text = ET.SubElement(tick_g, "text", {"fill": "currentColor", "x": f"-{offset}", "dy": "0.32em"})
        else:
            ET.SubElement(tick_g, "line", {"stroke": "currentColor", "y2": str(TICK_SIZE)})
            text = ET.SubElement(tick_g, "text", {"fill": "currentColor", "y": str(offset), "dy": "0.71em"})
        text.text = tick.label
    return g


def _legend_group(parent: ET.Element, chart_legend: Legend) -> ET.Element:
    g = _axis_group(parent, chart_legend.axis)
    for swatch in chart_legend.swatches:
        ET.SubElement(
            g,
            "rect",
            {
                "width": js_number(swatch.side),
                "height": js_number(swatch.side),
                "style": f"fill: {swatch.color};",
                "transform": f"translate({js_number(swatch.x)}, -{js_number(swatch.side)})",
            },
        )
    return g


def render_svg(layout: ChartLayout) -> ET.Element:
    """Build a fresh SVG element tree for the layout."""
    svg = ET.Element(
        "svg",
        {"xmlns": SVG_NS, "width": str(layout.width), "height": str(layout.height)},
    )
    for cell in layout.cells:
        attrs = cell.attributes()
        attrs["data-tooltip"] = format_tooltip_text(cell.year, cell.month, cell.temperature, cell.variance)
        ET.SubElement(svg, "rect", attrs)
    _axis_group(svg, layout.x_axis)
    _axis_group(svg, layout.y_axis)
    _legend_group(svg, layout.legend)
    return svg


def render_svg_string(layout: ChartLayout) -> str:
    return ET.tostring(render_svg(layout), encoding="unicode")


def render_page(layout: ChartLayout, title: str = "Monthly Global Land-Surface Temperature") -> str:
    return _jinja_env.get_template("chart.html.j2").render(
        title=title,
        description=layout.description,
        width=layout.width,
        height=layout.height,
        svg=Markup(render_svg_string(layout)),
        tooltip=layout.tooltip.model_dump(),
    )
