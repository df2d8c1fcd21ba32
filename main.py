# main.py
import argparse
import json

from geo_route.app.build import build
from geo_route.app.controllers.runner import distance_label
from geo_route.io.render import render_lines


def run(start: str, goal: str, *, detailed: bool, config: dict | None = None):
    cfg = config or {"seed_example": True, "log": {"level": "WARNING"}}
    app = build(cfg)

    print("\n".join(app.editor.edge_lines()))
    for kind in ("dijkstra", "astar"):
        res = app.run(start, goal, kind, emit_detail=detailed)
        print(f"\n== {kind}: {distance_label(res)}")
        # oldest first reads better on a terminal
        for line in reversed(render_lines(app.trace, detailed)):
            print(line)


def main() -> None:
    parser = argparse.ArgumentParser(description="Run Dijkstra and A* on a small map graph")
    parser.add_argument("--start", default="A")
    parser.add_argument("--goal", default="C")
    parser.add_argument("--detailed", action="store_true")
    parser.add_argument("--config", type=str, default=None, help="session config (JSON)")
    args = parser.parse_args()

    config = None
    if args.config:
        with open(args.config, "r") as f:
            config = json.load(f)
    run(args.start, args.goal, detailed=args.detailed, config=config)


if __name__ == "__main__":
    main()
