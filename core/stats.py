"""
Statistics aggregation for write-bench.

Reduces the per-chunk samples of one job into average, best and worst
throughput and latency.
"""

from dataclasses import dataclass
from functools import reduce
from typing import NamedTuple, Optional, Sequence


@dataclass(frozen=True)
class AggregateResult:
    """Reduced statistics for one job's sample sequence."""
    job_id: int
    throughput_avg: float    # kb/s
    latency_avg: float       # ms
    throughput_best: float
    latency_best: float
    throughput_worst: float
    latency_worst: float


class _Accumulator(NamedTuple):
    throughput_sum: float = 0.0
    latency_sum: float = 0.0
    throughput_best: Optional[float] = None
    latency_best: Optional[float] = None
    throughput_worst: Optional[float] = None
    latency_worst: Optional[float] = None


def _pick(current, candidate, better, unset):
    if unset(current) or better(candidate, current):
        return candidate
    return current


def _is_none(value):
    return value is None


def _is_zero(value):
    return value is None or value == 0


def _greater(a, b):
    return a > b


def _less(a, b):
    return a < b


def aggregate_samples(samples: Sequence, job_id: int, zero_sentinel: bool = False) -> AggregateResult:
    """
    Reduce a non-empty sequence of samples into an AggregateResult.

    Best throughput is the maximum and best latency the minimum; worst is
    the inverse of each.

    Args:
        samples: Sample objects (throughput_kbps, latency_ms)
        job_id: Id of the job that produced the samples
        zero_sentinel: Treat a stored value of 0 as "not seen yet", so any
            later sample replaces it. Use this to compare against tools that
            track best/worst from a zero start; by default a genuine 0 is kept like any other value.

    Raises:
        ValueError: samples is empty.
    """
    if not samples:
        raise ValueError(f"job {job_id}: cannot aggregate an empty sample sequence")

    unset = _is_zero if zero_sentinel else _is_none

    def step(acc, sample):
        return _Accumulator(
            throughput_sum=acc.throughput_sum + sample.throughput_kbps,
            latency_sum=acc.latency_sum + sample.latency_ms,
            throughput_best=_pick(acc.throughput_best, sample.throughput_kbps, _greater, unset),
            latency_best=_pick(acc.latency_best, sample.latency_ms, _less, unset),
            throughput_worst=_pick(acc.throughput_worst, sample.throughput_kbps, _less, unset),
            latency_worst=_pick(acc.latency_worst, sample.latency_ms, _greater, unset),
        )

    acc = reduce(step, samples, _Accumulator())
    count = len(samples)
    return AggregateResult(
        job_id=job_id,
        throughput_avg=acc.throughput_sum / count,
        latency_avg=acc.latency_sum / count,
        throughput_best=acc.throughput_best,
        latency_best=acc.latency_best,
        throughput_worst=acc.throughput_worst,
        latency_worst=acc.latency_worst,
    )
