import logging
from typing import List, Optional
from xml.etree import ElementTree as ET

from pydantic import BaseModel

from ..config import TooltipConfig
from ..utils.format import js_number, month_name, round2
from .grid import Cell

LOGGER = logging.getLogger(__name__)


class PointerEvent(BaseModel):
    client_x: float
    client_y: float


class TooltipNode(BaseModel):
    id: str = "tooltip"
    data_year: int
    top: float
    left: float
    html: str

    def style(self) -> str:
        return f"top: {js_number(self.top)}px; left: {js_number(self.left)}px;"

    def to_element(self) -> ET.Element:
        div = ET.Element("div", {"id": self.id, "data-year": str(self.data_year), "style": self.style()})
        p = ET.SubElement(div, "p")
        # html holds <br /> separators; keep them as markup
        parts = self.html.split("<br />")
        p.text = parts[0]
        for part in parts[1:]:
            br = ET.SubElement(p, "br")
            br.tail = part
        return div


class TooltipContainer:
    """Holds the tooltip nodes currently on the page."""

    def __init__(self):
        self.children: List[TooltipNode] = []

    def clear(self) -> None:
        self.children = []

    def append(self, node: TooltipNode) -> None:
        self.children.append(node)

    def find(self, node_id: str) -> Optional[TooltipNode]:
        return next((n for n in self.children if n.id == node_id), None)


def horizontal_offset(x: float, body_width: float, config: TooltipConfig) -> int:
    """Place right of the pointer unless the tooltip would run past the page edge."""
    if x + config.distance_right + config.width + config.page_padding > body_width:
        return config.distance_left
    return config.distance_right


def format_tooltip_text(year: int, month: int, temperature: float, variance: float) -> str:
    return (
        f"{year} - {month_name(month)}<br />"
        f"{js_number(round2(temperature))}℃<br />"
        f"{js_number(round2(variance))}℃"
    )


class TooltipController:
    """
    show -> move* -> hide, with at most one node in the container.

    The horizontal side is decided once on show; move only tracks the pointer
    vertically. Vertical placement centres on the pointer with no edge flip.
    """

    def __init__(self, container: TooltipContainer, config: TooltipConfig = TooltipConfig()):
        self.container = container
        self.config = config

    @property
    def active(self) -> Optional[TooltipNode]:
        return self.container.find("tooltip")

    def show(self, event: PointerEvent, cell: Cell, body_width: float) -> TooltipNode:
        distance = horizontal_offset(event.client_x, body_width, self.config)
        node = TooltipNode(
            data_year=cell.year,
            top=event.client_y + self.config.distance_top,
            left=event.client_x + distance,
            html=format_tooltip_text(cell.year, cell.month, cell.temperature, cell.variance),
        )
        self.container.clear()
        self.container.append(node)
        LOGGER.debug("Tooltip shown for %s-%02d at left=%s top=%s", cell.year, cell.month, node.left, node.top)
        return node

    def move(self, event: PointerEvent) -> Optional[TooltipNode]:
        node = self.active
        if node is None:
            return None
        node.top = event.client_y + self.config.distance_top
        return node

    def hide(self) -> None:
        self.container.clear()
