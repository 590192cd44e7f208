from dataclasses import dataclass


# Grid coordinates of the demo city, one decimal each
@dataclass(frozen=True)
class Point:
    x: float
    y: float
