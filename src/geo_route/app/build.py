# geo_route/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from geo_route.app.controllers.editor import GraphEditor
from geo_route.app.controllers.runner import SearchRunner
from geo_route.config.models import GraphModel, SessionModel
from geo_route.domain.graph import Graph
from geo_route.io.recorder import JsonlSink, Trace
from geo_route.io.trace_logging import TraceLogging
from geo_route.sim.clock import WallClock
from geo_route.sim.hooks import NoopHooks
from geo_route.sim.rng import RNGRegistry


@dataclass
class App:
    model: SessionModel
    graph: Graph
    trace: Trace
    editor: GraphEditor
    runner: SearchRunner
    rng: RNGRegistry

    def run(self, start: str | None, goal: str | None, kind: str | None = None, **kw):
        return self.runner.run(start, goal, kind, **kw)

    def reset(self) -> None:
        self.editor.reset()


def load_graph(editor: GraphEditor, graph_cfg: GraphModel) -> None:
    for n in graph_cfg.nodes:
        editor.add_node(n.lat, n.lng, n.id)
    for e in graph_cfg.edges:
        if e.weight is None:
            editor.connect(e.a, e.b)
        else:
            # explicit weights bypass the duplicate guard, same as Graph.add_edge
            editor.graph.add_edge(e.a, e.b, e.weight)


def build(cfg: SessionModel | Mapping | None = None, *, clock=None, use_logging: bool = True) -> App:
    # 0) Validate config
    if cfg is None:
        model = SessionModel()
    else:
        model = cfg if isinstance(cfg, SessionModel) else SessionModel.model_validate(cfg)

    # 1) RNG
    rng = RNGRegistry(model.seed, session=model.name)

    # 2) Logging & trace sinks
    hooks = (
        TraceLogging(
            run_id=model.run_id,
            level="DEBUG" if model.log.debug else model.log.level,
            debug=model.log.debug,
        )
        if use_logging
        else NoopHooks()
    )
    sinks = []
    if use_logging and model.trace.mirror_to_log:
        sinks.append(hooks)
    if model.trace.jsonl:
        sinks.append(JsonlSink())
    trace = Trace(*sinks, clock=clock or WallClock())

    # 3) Graph & controllers
    graph = Graph()
    editor = GraphEditor(graph, trace)
    runner = SearchRunner(graph, trace, model.search, detailed=model.trace.detailed, hooks=hooks)

    # 4) Initial graph content
    if model.seed_example:
        editor.seed_example()
    if model.graph is not None:
        load_graph(editor, model.graph)
    if model.scatter is not None:
        editor.scatter(model.scatter.n, model.scatter.bbox, rng.stream("scatter"))
    if model.auto_connect_k is not None:
        editor.auto_connect(model.auto_connect_k)

    return App(model, graph, trace, editor, runner, rng)
