import logging
from typing import Optional

from fastapi import FastAPI, Query
from fastapi.responses import HTMLResponse, Response
from pydantic import BaseModel, Field

from ..config import chart_config
from ..chart.colors import calculate_temperature, summarize_dataset
from ..chart.render import build_chart, render_page, render_svg_string
from ..chart.tooltip import PointerEvent, TooltipContainer, TooltipController
from ..chart.grid import Cell
from ..data.dataset import TemperatureRecord, dataset_description, load_dataset

app = FastAPI(title="Temperature Heatmap API", version="0.1.0")
LOGGER = logging.getLogger(__name__)


class TooltipRequest(BaseModel):
    record: TemperatureRecord
    base_temperature: float
    client_x: float
    client_y: float
    body_width: float = Field(..., gt=0, description="Rendered width of the page body in px.")


@app.get("/health")
async def health():
    return {"ok": True}


@app.get("/summary")
async def summary(use_demo: bool = False):
    dataset = load_dataset(use_demo=use_demo)
    return {
        "description": dataset_description(dataset),
        **summarize_dataset(dataset),
    }


def _layout(use_demo: bool, width: Optional[int], height: Optional[int]):
    dataset = load_dataset(use_demo=use_demo)
    config = chart_config(width, height)
    LOGGER.info("Rendering %dx%d chart (demo=%s)", config.width, config.height, use_demo)
    return build_chart(dataset, config)


@app.get("/chart", response_class=HTMLResponse)
async def chart(
    use_demo: bool = False,
    width: Optional[int] = Query(default=None, gt=0),
    height: Optional[int] = Query(default=None, gt=0),
):
    return HTMLResponse(render_page(_layout(use_demo, width, height)))


@app.get("/chart.svg")
async def chart_svg(
    use_demo: bool = False,
    width: Optional[int] = Query(default=None, gt=0),
    height: Optional[int] = Query(default=None, gt=0),
):
    return Response(render_svg_string(_layout(use_demo, width, height)), media_type="image/svg+xml")


@app.post("/tooltip")
async def tooltip(req: TooltipRequest):
    config = chart_config()
    temperature = calculate_temperature(req.base_temperature, req.record.variance)
    cell = Cell(
        x=0,
        y=0,
        width=0,
        height=0,
        fill="",
        year=req.record.year,
        month=req.record.month,
        variance=req.record.variance,
        temperature=temperature,
    )
    controller = TooltipController(TooltipContainer(), config.tooltip)
    node = controller.show(PointerEvent(client_x=req.client_x, client_y=req.client_y), cell, req.body_width)
    return {**node.model_dump(), "temperature": temperature}
