# tests/io/test_engine_logging.py
import json
import logging

from gps_graph.app.build import build
from gps_graph.domain.distance import EdgeWeightDistance
from gps_graph.io.engine_logging import EngineLogging, _default_json_logger


class _ListHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


def _logger():
    log = logging.getLogger("gps_graph.test")
    log.handlers.clear()
    h = _ListHandler()
    log.addHandler(h)
    log.setLevel(logging.DEBUG)
    log.propagate = False
    return log, h


def test_events_carry_structured_extra():
    log, h = _logger()
    hooks = EngineLogging(session="s1", logger=log)
    hooks.load(source="a.txt", added=3, total=3)
    hooks.regenerate(locations=3, edges=6, wall_ms=0.1)
    hooks.error("dijkstra", exc=KeyError("x"), source=9)

    msgs = [r.getMessage() for r in h.records]
    assert msgs == ["load", "regenerate", "engine_error"]
    assert h.records[0].extra == {"session": "s1", "source": "a.txt", "added": 3, "total": 3}
    assert h.records[2].levelname == "ERROR"
    assert h.records[2].extra["kind"] == "KeyError"


def test_run_logs_follow_debug_flag():
    log, h = _logger()
    quiet = EngineLogging(logger=log)
    quiet.run_start(source=0, mode="edge_weight", size=3)
    quiet.run_end(source=0, mode="edge_weight", settled=3, wall_ms=0.2)
    assert [(r.getMessage(), r.levelname) for r in h.records] == [("run_end", "DEBUG")]
    assert quiet.runs == 1

    h.records.clear()
    loud = EngineLogging(logger=log, debug=True)
    loud.run_start(source=0, mode="edge_weight", size=3)
    loud.run_end(source=0, mode="edge_weight", settled=3, wall_ms=0.2)
    assert [r.levelname for r in h.records] == ["DEBUG", "INFO"]


def test_json_formatter_output(capsys):
    log = _default_json_logger(name="gps_graph.jsontest", level="INFO")
    log.info("hello", extra={"extra": {"source": 1}})
    line = capsys.readouterr().out.strip().splitlines()[-1]
    assert json.loads(line) == {
        "level": "INFO",
        "msg": "hello",
        "logger": "gps_graph.jsontest",
        "source": 1,
    }


def test_app_wires_logging_into_engine():
    app = build({"session": {"seed": 3}})
    log, h = _logger()
    app.engine._hooks.log = log
    app.navigator.load("a", [("A", "R", 0.0, 0.0), ("B", "R", 0.1, 0.1), ("C", "R", 0.2, 0.0)])
    app.engine.run(0, EdgeWeightDistance())
    assert [r.getMessage() for r in h.records] == ["load", "regenerate", "run_end"]
