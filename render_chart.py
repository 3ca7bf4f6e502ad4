import argparse
import logging
from pathlib import Path

from src.chart.render import build_chart, render_page, render_svg_string
from src.config import chart_config
from src.data.dataset import load_dataset


def main():
    parser = argparse.ArgumentParser(description="Render the monthly temperature heatmap to a file.")
    parser.add_argument("--out", type=str, default="heatmap.html", help="Output path (.html or .svg).")
    parser.add_argument("--source", type=str, default=None, help="Dataset URL or local JSON file.")
    parser.add_argument("--demo", action="store_true", help="Use the synthetic dataset.")
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s :: %(message)s",
    )
    dataset = load_dataset(use_demo=args.demo, source=args.source)
    layout = build_chart(dataset, chart_config(args.width, args.height))

    out = Path(args.out)
    if out.suffix.lower() == ".svg":
        markup = render_svg_string(layout)
    else:
        markup = render_page(layout)
    out.write_text(markup, encoding="utf-8")
    logging.info("Wrote %s (%d cells)", out, len(layout.cells))
    print(layout.description)


if __name__ == "__main__":
    main()
