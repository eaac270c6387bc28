# gps_graph/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from gps_graph.app.navigator import Navigator
from gps_graph.app.queries import QueryService
from gps_graph.config.models import GpsModel
from gps_graph.core.rng import RNGRegistry
from gps_graph.domain.distance import make_distance
from gps_graph.domain.graph import AdjacencyGraph
from gps_graph.domain.store import LocationStore
from gps_graph.engine.dijkstra import ShortestPathEngine
from gps_graph.engine.hooks import NoopHooks
from gps_graph.io.engine_logging import EngineLogging  # JSON logs


@dataclass
class App:
    config: GpsModel
    rng: RNGRegistry
    store: LocationStore
    graph: AdjacencyGraph
    engine: ShortestPathEngine
    queries: QueryService
    navigator: Navigator


def build(cfg: GpsModel | Mapping | None = None, *, use_logging: bool = True) -> App:
    # 0) Validate config
    if cfg is None:
        model = GpsModel()
    else:
        model = cfg if isinstance(cfg, GpsModel) else GpsModel.model_validate(cfg)

    # 1) RNG & hooks
    rng_registry = RNGRegistry(model.session.seed, session=model.session.name)
    hooks = (
        EngineLogging(session=model.session.name, level=model.log.level, debug=model.log.debug)
        if use_logging
        else NoopHooks()
    )

    # 2) Core
    store = LocationStore()
    graph = AdjacencyGraph()
    engine = ShortestPathEngine(store, graph, hooks=hooks)
    queries = QueryService(engine)

    # 3) Caller-side session
    distances = {
        d.kind: make_distance(d.kind, **d.model_dump(exclude={"kind"})) for d in model.distances
    }
    navigator = Navigator(
        store=store,
        graph=graph,
        queries=queries,
        distances=distances,
        adjacency=model.adjacency,
        rng_adjacency=rng_registry.stream("adjacency"),
        rng_selection=rng_registry.stream("selection"),
        hooks=hooks,
    )

    return App(model, rng_registry, store, graph, engine, queries, navigator)
