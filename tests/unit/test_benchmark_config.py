"""Unit тесты для BenchmarkConfig.

Coverage:
- Значения по умолчанию (2048 бит, 128 итераций, 1024 trials на ядро)
- Валидация параметров
- Seed для batches
"""

import pytest

from primebench.bench.config import (
    KEY_SIZE_BITS,
    PRIMALITY_ITERATIONS,
    TRIES_PER_CORE_BASE,
    BenchmarkConfig,
    ExecutorKind,
)
from primebench.primality.solovay_strassen import WitnessRange


def test_defaults():
    config = BenchmarkConfig()

    assert config.bits == KEY_SIZE_BITS == 2048
    assert config.iterations == PRIMALITY_ITERATIONS == 128
    assert config.tries_per_core_base == TRIES_PER_CORE_BASE == 1024
    assert config.core_count is None
    assert config.total_tries_override is None
    assert config.executor_kind == ExecutorKind.PROCESS
    assert config.witness_range == WitnessRange.LOW_WORD
    assert config.seed is None


def test_config_is_frozen():
    config = BenchmarkConfig()
    with pytest.raises(AttributeError):
        config.bits = 512


@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"bits": 1}, "bits must be >= 2"),
        ({"bits": 0}, "bits must be >= 2"),
        ({"iterations": -1}, "iterations must be non-negative"),
        ({"tries_per_core_base": -5}, "tries_per_core_base must be non-negative"),
        ({"core_count": 0}, "core_count must be positive"),
        ({"total_tries_override": -1}, "total_tries_override must be non-negative"),
        ({"executor_kind": "fiber"}, "executor_kind must be ExecutorKind"),
        ({"witness_range": "half"}, "witness_range must be WitnessRange"),
    ],
)
def test_invalid_values_rejected(kwargs, message):
    with pytest.raises(ValueError, match=message):
        BenchmarkConfig(**kwargs)


def test_zero_iterations_and_override_allowed():
    config = BenchmarkConfig(iterations=0, total_tries_override=0)
    assert config.iterations == 0
    assert config.total_tries_override == 0


def test_batch_seed_without_seed():
    config = BenchmarkConfig()
    assert config.batch_seed(0) is None
    assert config.batch_seed(5) is None


def test_batch_seed_derivation():
    config = BenchmarkConfig(seed=1234)
    assert config.batch_seed(0) == 1234
    assert config.batch_seed(1) == 1234 ^ (1 << 13)
    assert len({config.batch_seed(i) for i in range(64)}) == 64
