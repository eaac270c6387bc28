# io/engine_logging.py
import json
import logging
import sys

from gps_graph.engine.hooks import NoopHooks


def _default_json_logger(name="gps_graph", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload, default=str)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


class EngineLogging(NoopHooks):
    """Structured logs for loads, regenerations and shortest-path runs."""

    def __init__(
        self,
        session: str = "gps",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
    ):
        self.session, self.debug = session, debug
        self.log = logger or _default_json_logger(level=level)
        self.runs = 0

    def _emit(self, level: str, msg: str, **extra):
        payload = {"session": self.session, **extra}
        self.log.log(getattr(logging, level), msg, extra={"extra": payload})

    def load(self, *, source: str, added: int, total: int):
        self._emit("INFO", "load", source=source, added=added, total=total)

    def regenerate(self, *, locations: int, edges: int, wall_ms: float):
        self._emit("INFO", "regenerate", locations=locations, edges=edges, wall_ms=wall_ms)

    def run_start(self, *, source: int, mode: str, size: int):
        self.runs += 1
        if self.debug:
            self._emit("DEBUG", "run_start", source=source, mode=mode, size=size)

    def run_end(self, *, source: int, mode: str, settled: int, wall_ms: float):
        self._emit(
            "INFO" if self.debug else "DEBUG",
            "run_end",
            source=source,
            mode=mode,
            settled=settled,
            wall_ms=wall_ms,
        )

    def error(self, op: str, *, exc: BaseException, **extra):
        self._emit("ERROR", "engine_error", op=op, error=str(exc), kind=type(exc).__name__, **extra)
