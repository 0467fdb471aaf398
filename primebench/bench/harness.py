"""Benchmark harness: прогон trials в SINGLE или MULTI режиме.

Trial = сгенерировать случайный нечётный кандидат + проверить его тестом
Solovay–Strassen. Harness считает probable primes и throughput.

Нагрузка:
- tries_per_core = floor(tries_per_core_base * scale), не меньше 0
- total_tries = tries_per_core * core_count (одинаково для обоих режимов)
- total_tries_override задаёт total_tries напрямую, тогда
  tries_per_core = ceil(total_tries / core_count)

Исполнение:
- SINGLE: один batch на вызывающем потоке
- MULTI: total_tries делится на core_count batches, batches исполняются
  в concurrent.futures пуле из core_count workers

Редукция: каждый batch возвращает свою частичную сумму, суммы складываются
после завершения всех batches. Блокировки на время trial не берутся.
У каждого batch свой random.Random.
"""

import logging
import os
import random
import time
from concurrent.futures import (
    BrokenExecutor,
    Executor,
    ProcessPoolExecutor,
    ThreadPoolExecutor,
)
from dataclasses import dataclass
from functools import partial
from typing import Callable, List, Optional

from primebench.bench.config import BenchmarkConfig, ExecutorKind
from primebench.core.contracts.validators import validate_benchmark_report
from primebench.core.domain.benchmark import BenchmarkReport, ExecutionMode
from primebench.core.math.numerical_safeguards import (
    EPS_ELAPSED_SEC,
    floor_non_negative,
    safe_divide,
)
from primebench.core.math.random_odd import generate_odd_random_number
from primebench.primality.solovay_strassen import solovay_strassen

logger = logging.getLogger(__name__)

# (candidate, iterations, rng) -> probably prime
PrimeOracle = Callable[[int, int, random.Random], bool]

# (bits, rng) -> odd candidate
CandidateGenerator = Callable[[int, random.Random], int]


# =============================================================================
# EXCEPTIONS
# =============================================================================


class BenchmarkExecutionError(Exception):
    """
    Пул workers не удалось создать или он аварийно завершился.

    Прогон считается проваленным целиком, частичный отчёт не формируется.
    """


# =============================================================================
# TRIAL BATCHES
# =============================================================================


@dataclass(frozen=True)
class TrialBatch:
    """Независимая порция trials для одного worker."""

    batch_index: int
    size: int
    bits: int
    iterations: int
    seed: Optional[int]
    is_prime: PrimeOracle
    generate: CandidateGenerator


def partition_trials(total_tries: int, parts: int) -> List[int]:
    """
    Разбиение total_tries на `parts` почти равных частей.

    Первые total_tries % parts частей на 1 больше остальных.

    Examples:
        >>> partition_trials(10, 4)
        [3, 3, 2, 2]
        >>> partition_trials(2, 4)
        [1, 1, 0, 0]
    """
    if total_tries < 0:
        raise ValueError(f"total_tries must be non-negative, got {total_tries}")
    if parts < 1:
        raise ValueError(f"parts must be positive, got {parts}")

    base, remainder = divmod(total_tries, parts)
    return [base + 1 if i < remainder else base for i in range(parts)]


def run_trial_batch(batch: TrialBatch) -> int:
    """Исполнение batch; возвращает число probable primes в нём."""
    # Random(None) берёт seed из os.urandom
    rng = random.Random(batch.seed)
    count = 0
    for _ in range(batch.size):
        candidate = batch.generate(batch.bits, rng)
        if batch.is_prime(candidate, batch.iterations, rng):
            count += 1
    return count


def _build_batches(
    sizes: List[int],
    config: BenchmarkConfig,
    is_prime: PrimeOracle,
    generate: CandidateGenerator,
) -> List[TrialBatch]:
    return [
        TrialBatch(
            batch_index=i,
            size=size,
            bits=config.bits,
            iterations=config.iterations,
            seed=config.batch_seed(i),
            is_prime=is_prime,
            generate=generate,
        )
        for i, size in enumerate(sizes)
        if size > 0
    ]


def _make_executor(kind: ExecutorKind, workers: int) -> Executor:
    if kind == ExecutorKind.PROCESS:
        return ProcessPoolExecutor(max_workers=workers)
    return ThreadPoolExecutor(max_workers=workers, thread_name_prefix="primebench")


def _pool_failure(kind: ExecutorKind, workers: int, error: Exception) -> BenchmarkExecutionError:
    return BenchmarkExecutionError(f"{kind.value} pool with {workers} workers failed: {error}")


def _run_pooled(batches: List[TrialBatch], kind: ExecutorKind, workers: int) -> int:
    # Оборачиваются только ошибки самого пула; исключения из trials
    # future.result() пробрасывает без изменений, как в SINGLE режиме
    try:
        executor = _make_executor(kind, workers)
    except (OSError, RuntimeError) as e:
        raise _pool_failure(kind, workers, e) from e

    with executor:
        futures = []
        for batch in batches:
            logger.debug(
                "Dispatching batch %d: %d trials", batch.batch_index, batch.size
            )
            try:
                futures.append(executor.submit(run_trial_batch, batch))
            except (BrokenExecutor, OSError, RuntimeError) as e:
                raise _pool_failure(kind, workers, e) from e

        probable_primes = 0
        for future in futures:
            try:
                probable_primes += future.result()
            except BrokenExecutor as e:
                raise _pool_failure(kind, workers, e) from e
        return probable_primes


# =============================================================================
# HARNESS
# =============================================================================


def detect_core_count() -> int:
    """Число логических ядер (не меньше 1)."""
    return os.cpu_count() or 1


def run_benchmark_report(
    mode: ExecutionMode,
    scale: float,
    config: Optional[BenchmarkConfig] = None,
    is_prime: Optional[PrimeOracle] = None,
    generate: Optional[CandidateGenerator] = None,
) -> BenchmarkReport:
    """Прогон benchmark с возвратом структурированного отчёта.

    Args:
        mode: SINGLE или MULTI
        scale: Множитель нагрузки; NaN/Inf/<= 0 дают пустой прогон
        config: Параметры прогона (default: BenchmarkConfig())
        is_prime: Замена теста простоты (default: Solovay–Strassen с
            config.witness_range)
        generate: Замена генератора кандидатов
            (default: generate_odd_random_number)

    Returns:
        BenchmarkReport, прошедший проверку по benchmark_report.json

    Raises:
        BenchmarkExecutionError: Если пул workers не удалось создать или
            он аварийно завершился (только MULTI)
        jsonschema.ValidationError: Если отчёт нарушает контракт
    """
    mode = ExecutionMode(mode)
    config = config or BenchmarkConfig()
    if is_prime is None:
        is_prime = partial(solovay_strassen, witness_range=config.witness_range)
    if generate is None:
        generate = generate_odd_random_number

    core_count = config.core_count or detect_core_count()
    if config.total_tries_override is not None:
        total_tries = config.total_tries_override
        # доля самого нагруженного ядра: ceil(total / core_count)
        tries_per_core = -(-total_tries // core_count)
    else:
        tries_per_core = floor_non_negative(config.tries_per_core_base * scale)
        total_tries = tries_per_core * core_count

    worker_count = 1 if mode == ExecutionMode.SINGLE else core_count
    batches = _build_batches(
        partition_trials(total_tries, worker_count), config, is_prime, generate
    )

    logger.info(
        "Starting %s benchmark: %d trials, %d-bit candidates, %d iterations, %d workers",
        mode.value,
        total_tries,
        config.bits,
        config.iterations,
        worker_count,
    )

    start = time.perf_counter()
    if mode == ExecutionMode.SINGLE or not batches:
        probable_primes = sum(run_trial_batch(batch) for batch in batches)
    else:
        probable_primes = _run_pooled(batches, config.executor_kind, worker_count)
    elapsed = time.perf_counter() - start

    throughput = safe_divide(total_tries, elapsed, eps=EPS_ELAPSED_SEC, fallback=0.0)

    report = BenchmarkReport(
        mode=mode,
        bits=config.bits,
        iterations=config.iterations,
        tries_per_core=tries_per_core,
        total_tries=total_tries,
        core_count=core_count,
        worker_count=worker_count,
        batch_count=len(batches),
        probable_primes=probable_primes,
        elapsed_seconds=elapsed,
        throughput=throughput,
    )
    validate_benchmark_report(report.to_contract_dict())

    logger.info(
        "Finished %s benchmark: %d probable primes in %.4fs (%.2f tries/s)",
        mode.value,
        probable_primes,
        elapsed,
        throughput,
    )
    return report


def run_benchmark(
    mode: ExecutionMode,
    scale: float,
    config: Optional[BenchmarkConfig] = None,
) -> str:
    """Прогон benchmark; возвращает двухстрочную текстовую сводку."""
    return run_benchmark_report(mode, scale, config).format_summary()
