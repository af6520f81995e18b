from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class Neighbor:
    target: str
    weight: float


@dataclass(slots=True)
class PathResult:
    path: list[str] = field(default_factory=list)
    cost: float = 0.0
    aborted: bool = False

    @property
    def found(self) -> bool:
        return bool(self.path)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"path": list(self.path), "cost": self.cost}
        if self.aborted:
            payload["aborted"] = True
        return payload


@dataclass(slots=True)
class DegreeEntry:
    id: str
    degree: int

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "degree": self.degree}
