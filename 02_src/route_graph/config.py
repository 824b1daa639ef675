"""Environment-driven settings for the graph engine."""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .weighted import PRIORITY, RELAXATION_STRATEGIES

DEFAULT_MAX_TIE_DEPTH = 64


@dataclass(frozen=True)
class EngineSettings:
    max_tie_depth: int = DEFAULT_MAX_TIE_DEPTH
    relaxation: str = PRIORITY
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.max_tie_depth < 1:
            raise ValueError(f"max_tie_depth must be at least 1, got {self.max_tie_depth}")
        if self.relaxation not in RELAXATION_STRATEGIES:
            raise ValueError(
                f"relaxation must be one of {', '.join(RELAXATION_STRATEGIES)}, got {self.relaxation!r}"
            )
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level}")

    @classmethod
    def from_env(cls) -> "EngineSettings":
        load_dotenv()
        raw_depth = os.getenv("ROUTE_GRAPH_MAX_TIE_DEPTH", str(DEFAULT_MAX_TIE_DEPTH))
        try:
            max_tie_depth = int(raw_depth)
        except ValueError as error:
            raise ValueError(f"ROUTE_GRAPH_MAX_TIE_DEPTH must be an integer, got {raw_depth!r}") from error
        return cls(
            max_tie_depth=max_tie_depth,
            relaxation=os.getenv("ROUTE_GRAPH_RELAXATION", PRIORITY).strip().lower(),
            log_level=os.getenv("ROUTE_GRAPH_LOG_LEVEL", "INFO").strip().upper(),
        )
