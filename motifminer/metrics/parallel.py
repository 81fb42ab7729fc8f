"""Fork-join execution of per-itemset work over round-robin partitions."""
import os
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import wait
from typing import Callable
from typing import TypeVar

from motifminer.model.itemset import Itemset
from motifminer.mining.exceptions import ConfigurationError
from motifminer.mining.exceptions import MetricEvaluationError
from motifminer.standalone_utilities.log_formats import colorized_logger

logger = colorized_logger(__name__)

T = TypeVar('T')
R = TypeVar('R')


def resolve_level_of_parallelism(level_of_parallelism: int) -> int:
    if level_of_parallelism == -1:
        return os.cpu_count() or 1
    if level_of_parallelism < 1:
        raise ConfigurationError(f'Invalid level of parallelism: {level_of_parallelism}')
    return level_of_parallelism


def partition(elements: list[T], k: int) -> list[list[T]]:
    """Distributes elements round-robin into at most ``k`` non-empty partitions."""
    partitions: list[list[T]] = [[] for _ in range(k)]
    for i, element in enumerate(elements):
        partitions[i % k].append(element)
    return [p for p in partitions if len(p) > 0]


def fork_join(task: Callable[[list[T]], R], partitions: list[list[T]], phase: str) -> list[R]:
    """Runs one task per partition and blocks until all have finished.

    If any task raised, the phase fails on the calling thread after every task was joined, and
    no result is returned.
    """
    if len(partitions) == 0:
        return []
    with ThreadPoolExecutor(max_workers=len(partitions), thread_name_prefix='motifminer') as executor:
        futures = [executor.submit(task, p) for p in partitions]
        wait(futures)
    failures = [f.exception() for f in futures if f.exception() is not None]
    if len(failures) > 0:
        for failure in failures:
            logger.error('Task of %s failed: %s', phase, failure)
        raise MetricEvaluationError(phase, len(failures), len(futures)) from failures[0]
    return [f.result() for f in futures]


def evaluate_partitioned(
    itemsets: list[Itemset],
    evaluate: Callable[[Itemset], R],
    level_of_parallelism: int,
    phase: str,
) -> dict[Itemset, R]:
    """Evaluates every itemset exactly once. Each partition fills its own dictionary; these are
    merged after the barrier.
    """
    k = resolve_level_of_parallelism(level_of_parallelism)

    def task(partition_itemsets: list[Itemset]) -> dict[Itemset, R]:
        return {itemset: evaluate(itemset) for itemset in partition_itemsets}

    merged: dict[Itemset, R] = {}
    for local in fork_join(task, partition(itemsets, k), phase):
        merged.update(local)
    return merged
