import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from src.chart.grid import Cell
from src.chart.tooltip import (
    PointerEvent,
    TooltipContainer,
    TooltipController,
    format_tooltip_text,
    horizontal_offset,
)
from src.config import TooltipConfig
from src.utils.format import js_number, round2


def _cell(year=1880, month=1, variance=-0.78, temperature=7.88):
    return Cell(
        x=0, y=0, width=10, height=10, fill="#313695",
        year=year, month=month, variance=variance, temperature=temperature,
    )


def test_horizontal_flip_at_page_edge():
    cfg = TooltipConfig()
    assert horizontal_offset(600, 800, cfg) == -220
    assert horizontal_offset(560, 800, cfg) == 20
    assert horizontal_offset(561, 800, cfg) == -220


def test_tooltip_text():
    text = format_tooltip_text(1880, 1, 7.88, -0.78)
    assert text == "1880 - January<br />7.88℃<br />-0.78℃"
    assert "1915 - December<br />8℃<br />-0.66℃" == format_tooltip_text(1915, 12, 8.0, -0.66)


def test_round2_and_number_printing():
    assert round2(1.005) == 1.01
    assert round2(7.884999) == 7.88
    assert js_number(round2(7.9)) == "7.9"
    assert js_number(round2(-0.0001)) == "0"
    assert js_number(12) == "12"


def test_show_move_hide_keeps_single_node():
    container = TooltipContainer()
    controller = TooltipController(container)

    node = controller.show(PointerEvent(client_x=600, client_y=300), _cell(), body_width=800)
    assert len(container.children) == 1
    assert node.data_year == 1880
    assert node.left == 380
    assert node.top == 250
    assert "1880 - January" in node.html

    controller.show(PointerEvent(client_x=100, client_y=200), _cell(year=1881), body_width=800)
    assert len(container.children) == 1
    assert controller.active.data_year == 1881
    assert controller.active.left == 120

    moved = controller.move(PointerEvent(client_x=700, client_y=410))
    assert moved.top == 360
    assert moved.left == 120

    controller.hide()
    assert container.children == []
    assert controller.move(PointerEvent(client_x=1, client_y=1)) is None


def test_tooltip_node_element():
    controller = TooltipController(TooltipContainer())
    node = controller.show(PointerEvent(client_x=10, client_y=60), _cell(), body_width=1000)
    div = node.to_element()
    assert div.get("id") == "tooltip"
    assert div.get("data-year") == "1880"
    assert div.get("style") == "top: 10px; left: 30px;"
    p = div.find("p")
    assert p.text == "1880 - January"
    assert len(p.findall("br")) == 2


def test_js_number_avoids_exponent_form_like_browsers():
    assert js_number(0.00001) == "0.00001"
    assert js_number(0.0000015) == "0.0000015"
    assert js_number(1e16) == "10000000000000000"
    assert js_number(1e-8) == "1e-8"
    assert js_number(1e21) == "1e+21"
