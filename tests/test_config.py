from __future__ import annotations

import pytest

from expand_engine.config import EngineConfig
from expand_engine.generators import DEFAULT_GENERATOR_ORDER, default_generators


def test_defaults() -> None:
    config = EngineConfig()

    assert config.generator_ids == DEFAULT_GENERATOR_ORDER
    assert config.restore_on_cancel is False
    assert config.verbose is False
    assert config.max_candidates == 26


def test_generator_lists_are_independent() -> None:
    first = EngineConfig()
    second = EngineConfig()

    first.generators.pop()

    assert len(second.generators) == len(DEFAULT_GENERATOR_ORDER)


def test_from_env_mapping() -> None:
    config = EngineConfig.from_env(
        {
            "EXPAND_ENGINE_GENERATORS": "word, list,,comment",
            "EXPAND_ENGINE_RESTORE_ON_CANCEL": "yes",
            "EXPAND_ENGINE_VERBOSE": "0",
            "EXPAND_ENGINE_MAX_CANDIDATES": "5",
        }
    )

    assert config.generator_ids == ("word", "list", "comment")
    assert config.restore_on_cancel is True
    assert config.verbose is False
    assert config.max_candidates == 5


def test_from_env_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXPAND_ENGINE_VERBOSE", "true")
    monkeypatch.delenv("EXPAND_ENGINE_GENERATORS", raising=False)

    config = EngineConfig.from_env()

    assert config.verbose is True
    assert config.generator_ids == DEFAULT_GENERATOR_ORDER


def test_unknown_generator_id() -> None:
    with pytest.raises(KeyError):
        EngineConfig.from_env({"EXPAND_ENGINE_GENERATORS": "word,telepathy"})


def test_max_candidates_must_be_positive() -> None:
    with pytest.raises(ValueError):
        EngineConfig(max_candidates=0)


def test_default_generators_filters() -> None:
    ids = [ref.id for ref in default_generators(exclude=["subword", "paragraph"])]

    assert ids == ["word", "list", "string", "syntax-tree", "comment"]
    assert [ref.id for ref in default_generators(include=["comment"])] == ["comment"]
