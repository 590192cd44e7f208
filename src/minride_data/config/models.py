import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

DEFAULT_DRIVERS = 100
DEFAULT_CUSTOMERS = 100
DEFAULT_RIDES = 500
DEFAULT_OUTPUT_DIR = "Data"


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


class GeneratorModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    run_id: str = "local"
    drivers: int = DEFAULT_DRIVERS
    customers: int = DEFAULT_CUSTOMERS
    rides: int = DEFAULT_RIDES
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    seed: int | None = None  # None => seeded from the wall clock at build time
    log: LogModel = Field(default_factory=LogModel)

    @field_validator("drivers", "customers", "rides")
    @classmethod
    def _nonneg(cls, v: int, info: ValidationInfo) -> int:
        if v < 0:
            raise ValueError(f"{info.field_name} must be >= 0")
        return v

    @field_validator("output_dir", mode="before")
    @classmethod
    def _expand(cls, v):
        if isinstance(v, (str, os.PathLike)):
            return Path(os.path.expandvars(os.path.expanduser(os.fspath(v))))
        return v

    @model_validator(mode="after")
    def _rides_need_participants(self):
        # ride references are drawn from [1, drivers] and [1, customers]
        if self.rides > 0 and (self.drivers < 1 or self.customers < 1):
            raise ValueError("rides require at least one driver and one customer")
        return self
