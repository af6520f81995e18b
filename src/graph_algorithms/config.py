from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(slots=True)
class AlgorithmConfig:
    default_centrality_limit: int
    iteration_slack: int
    default_weight: float


def load_algorithm_config() -> AlgorithmConfig:
    return AlgorithmConfig(
        default_centrality_limit=int(os.getenv("ALGO_CENTRALITY_LIMIT", "5")),
        iteration_slack=int(os.getenv("ALGO_ITERATION_SLACK", "200")),
        default_weight=float(os.getenv("ALGO_DEFAULT_WEIGHT", "1.0")),
    )
