# io/run_logging.py
import json
import logging
import sys
from pathlib import Path

from minride_data.sim.hooks import NoopHooks


def _default_json_logger(name="minride_data", level="INFO"):
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


class RunLogging(NoopHooks):
    """
    Progress reporting for a generation run, one JSON object per line on stdout.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        logger: logging.Logger | None = None,
    ):
        self.run_id = run_id
        self.log = logger or _default_json_logger(level=level)

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    def run_start(self, *, seed: int, output_dir: Path, counts: dict[str, int]):
        self._emit("INFO", "run_start", seed=seed, output_dir=str(output_dir), **counts)

    def generating(self, *, kind: str, count: int):
        self._emit("INFO", "generating", kind=kind, count=count)

    def file_written(self, *, kind: str, path: Path, rows: int):
        self._emit("INFO", "file_written", kind=kind, path=str(path), rows=rows)

    def run_end(self, *, counts: dict[str, int], wall_ms: float):
        self._emit("INFO", "run_end", wall_ms=round(wall_ms, 1), **counts)

    def error(self, *, exc: BaseException, **extra):
        self._emit("ERROR", "run_error", error=str(exc), error_type=type(exc).__name__, **extra)
