"""Engine configuration and environment loading."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from expand_engine.generators import GeneratorRef, default_generators, select_generators

ENV_PREFIX = "EXPAND_ENGINE_"
DEFAULT_MAX_CANDIDATES = 26


def _flag(raw: Optional[str], default: bool) -> bool:
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(slots=True)
class EngineConfig:
    """Knobs shared by every session created with this config.

    ``generators`` is evaluated in order; the order only decides ties
    between equally long spans. ``max_candidates`` bounds how many pending
    candidates a front end may address by index.
    """

    generators: List[GeneratorRef] = field(default_factory=default_generators)
    restore_on_cancel: bool = False
    verbose: bool = False
    max_candidates: int = DEFAULT_MAX_CANDIDATES

    def __post_init__(self) -> None:
        if self.max_candidates <= 0:
            raise ValueError("max_candidates must be positive")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EngineConfig":
        env = os.environ if environ is None else environ

        def value(name: str) -> Optional[str]:
            return env.get(f"{ENV_PREFIX}{name}")

        ids = value("GENERATORS")
        generators = select_generators(ids.split(",")) if ids else default_generators()
        return cls(
            generators=generators,
            restore_on_cancel=_flag(value("RESTORE_ON_CANCEL"), False),
            verbose=_flag(value("VERBOSE"), False),
            max_candidates=int(value("MAX_CANDIDATES") or DEFAULT_MAX_CANDIDATES),
        )

    @property
    def generator_ids(self) -> tuple[str, ...]:
        return tuple(generator.id for generator in self.generators)


__all__ = ["EngineConfig", "ENV_PREFIX", "DEFAULT_MAX_CANDIDATES"]
