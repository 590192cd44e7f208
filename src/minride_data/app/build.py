# minride_data/app/build.py
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from minride_data.config.models import GeneratorModel
from minride_data.domain.entities.customer import Customer
from minride_data.domain.entities.driver import Driver
from minride_data.domain.entities.ride import Ride
from minride_data.domain.generators import iter_customers, iter_drivers, iter_rides
from minride_data.io.csv_files import CUSTOMERS_FILE, DRIVERS_FILE, RIDES_FILE, DatasetWriter
from minride_data.io.run_logging import RunLogging
from minride_data.sim.clock import WallClock
from minride_data.sim.hooks import GeneratorHooks, NoopHooks
from minride_data.sim.rng import RNGRegistry


@dataclass(frozen=True)
class DatasetSummary:
    output_dir: Path
    seed: int
    files: dict[str, Path] = field(default_factory=dict)
    counts: dict[str, int] = field(default_factory=dict)


@dataclass
class App:
    cfg: GeneratorModel
    clock: WallClock
    rng: RNGRegistry
    hooks: GeneratorHooks

    def run(self) -> DatasetSummary:
        """Generate drivers, customers, rides (in that order) and commit all three files."""
        cfg = self.cfg
        counts = {"drivers": cfg.drivers, "customers": cfg.customers, "rides": cfg.rides}
        t0 = time.perf_counter()
        self.hooks.run_start(seed=self.rng.master_seed, output_dir=cfg.output_dir, counts=counts)

        # records are formatted as they are generated; none are kept around
        tables = [
            (
                "drivers",
                DRIVERS_FILE,
                Driver.HEADER,
                lambda: iter_drivers(self.rng.stream("drivers"), cfg.drivers),
            ),
            (
                "customers",
                CUSTOMERS_FILE,
                Customer.HEADER,
                lambda: iter_customers(self.rng.stream("customers"), cfg.customers),
            ),
            (
                "rides",
                RIDES_FILE,
                Ride.HEADER,
                lambda: iter_rides(
                    self.rng.stream("rides"),
                    cfg.rides,
                    n_customers=cfg.customers,
                    n_drivers=cfg.drivers,
                    clock=self.clock,
                ),
            ),
        ]

        written: dict[str, int] = {}
        try:
            with DatasetWriter(cfg.output_dir) as writer:
                for kind, filename, header, records in tables:
                    self.hooks.generating(kind=kind, count=counts[kind])
                    written[kind] = writer.stage(filename, header, (r.to_row() for r in records()))
                files = writer.commit()
        except Exception as e:
            self.hooks.error(exc=e, output_dir=str(cfg.output_dir))
            raise

        for kind, filename, _, _ in tables:
            self.hooks.file_written(kind=kind, path=files[filename], rows=written[kind])
        self.hooks.run_end(counts=written, wall_ms=(time.perf_counter() - t0) * 1000.0)

        return DatasetSummary(
            output_dir=cfg.output_dir,
            seed=self.rng.master_seed,
            files={kind: files[filename] for kind, filename, _, _ in tables},
            counts=written,
        )


def build(
    cfg: GeneratorModel | Mapping | None = None,
    *,
    clock: WallClock | None = None,
    use_logging: bool = True,
) -> App:
    # 0) Validate config
    if cfg is None:
        model = GeneratorModel()
    else:
        model = cfg if isinstance(cfg, GeneratorModel) else GeneratorModel.model_validate(cfg)

    # 1) Clock & RNG; an unseeded run draws its seed from the wall clock once
    clock = clock or WallClock()
    seed = model.seed if model.seed is not None else time.time_ns()
    rng_registry = RNGRegistry(seed)

    # 2) Hooks
    hooks = RunLogging(run_id=model.run_id, level=model.log.level) if use_logging else NoopHooks()

    return App(cfg=model, clock=clock, rng=rng_registry, hooks=hooks)
