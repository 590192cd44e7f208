# sim/hooks.py
from pathlib import Path
from typing import Protocol


class GeneratorHooks(Protocol):
    def run_start(self, *, seed: int, output_dir: Path, counts: dict[str, int]): ...
    def generating(self, *, kind: str, count: int): ...
    def file_written(self, *, kind: str, path: Path, rows: int): ...
    def run_end(self, *, counts: dict[str, int], wall_ms: float): ...
    def error(self, *, exc: BaseException, **kw): ...


class NoopHooks:
    def run_start(self, **_):
        pass

    def generating(self, **_):
        pass

    def file_written(self, **_):
        pass

    def run_end(self, **_):
        pass

    def error(self, **_):
        pass
