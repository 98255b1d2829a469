from dataclasses import dataclass


@dataclass(frozen=True)
class PlanCost:
    rows: float = 0.0
    cpu: float = 0.0
    io: float = 0.0

    def __add__(self, other: object) -> "PlanCost":
        if not isinstance(other, PlanCost):
            return NotImplemented
        return PlanCost(self.rows + other.rows, self.cpu + other.cpu, self.io + other.io)

    def __str__(self) -> str:
        return f"{{{float(self.rows)} rows, {float(self.cpu)} cpu, {float(self.io)} io}}"
