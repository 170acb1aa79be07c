"""
Write latency benchmark - concurrent timed block writes to ephemeral files.

Every job creates its own file, writes it in fixed-size chunks while timing
each write, deletes it, and reports aggregate throughput and latency.
Jobs run on worker threads behind a semaphore that caps how many are
writing at once.
"""

import os
import queue
import shutil
import threading
import time
from dataclasses import dataclass, field
from typing import List

from benchmarks.base import BenchmarkBase
from benchmarks.block_writer import artifact_name, open_artifact, remove_artifact, write_blocks
from core.errors import BlockWriteError
from core.stats import AggregateResult, aggregate_samples
from utils import print_info, print_error, print_warning, print_header, print_success


@dataclass(frozen=True)
class JobSpec:
    """Fixed parameters of one job."""
    job_id: int
    block_size: int
    file_size: int


@dataclass(frozen=True)
class JobFailure:
    """A job that produced no result."""
    job_id: int
    stage: str      # "open" or "write"
    error: str


@dataclass
class RunSummary:
    """Outcome of one benchmark run."""
    num_tests: int
    num_jobs: int
    block_size: int
    file_size: int
    duration_seconds: float = 0.0
    results: List[AggregateResult] = field(default_factory=list)
    failures: List[JobFailure] = field(default_factory=list)


class WriteLatencyBenchmark(BenchmarkBase):
    """Bounded-concurrency block write benchmark."""

    name = "write_latency"
    description = "Concurrent chunked file writes with per-chunk throughput and latency"

    def __init__(self, config, opener=open_artifact, writer=write_blocks, zero_sentinel=False):
        """
        Initialize the benchmark.

        Args:
            config: BenchmarkConfig with sizes, job counts and target directory
            opener: callable(path, sync) returning a writable binary handle
            writer: callable(file_size, handle, block_size, path) returning samples
            zero_sentinel: Passed through to aggregate_samples
        """
        self.config = config
        self.opener = opener
        self.writer = writer
        self.zero_sentinel = zero_sentinel
        self.results = []

    def validate(self) -> bool:
        """Check the target directory exists and is writable."""
        directory = self.config.directory
        return os.path.isdir(directory) and os.access(directory, os.W_OK)

    @property
    def space_required_bytes(self) -> int:
        """Only num_jobs files exist at once, each removed when its job ends."""
        return min(self.config.num_jobs, self.config.num_tests) * self.config.file_size

    def _check_space(self):
        try:
            free = shutil.disk_usage(self.config.directory).free
        except OSError as e:
            print_warning(f"Could not determine free space in {self.config.directory}: {e}")
            return
        if free < self.space_required_bytes:
            print_warning(f"Only {free} bytes free in {self.config.directory}, "
                          f"benchmark needs up to {self.space_required_bytes} bytes")

    def _run_job(self, spec, slots, results, failures):
        """Worker body for one job. Open and write errors are recorded, not raised."""
        samples = None

        with slots:
            path = os.path.join(self.config.directory, artifact_name(spec.job_id))
            try:
                handle = self.opener(path, self.config.sync)
            except OSError as e:
                print_error(f"Job {spec.job_id}: failed to open file {path}: {e}")
                failures.put(JobFailure(spec.job_id, "open", str(e)))
                return

            try:
                samples = self.writer(spec.file_size, handle, spec.block_size, path)
            except BlockWriteError as e:
                print_error(f"Job {spec.job_id}: {e}")
                failures.put(JobFailure(spec.job_id, "write", str(e.cause)))
            except Exception as e:
                print_error(f"Job {spec.job_id}: unexpected error writing {path}: {e!r}")
                failures.put(JobFailure(spec.job_id, "write", repr(e)))
            finally:
                try:
                    handle.close()
                except OSError as e:
                    print_warning(f"Job {spec.job_id}: failed to close {path}: {e}")
                remove_artifact(path)

        if samples:
            results.put(aggregate_samples(samples, spec.job_id, zero_sentinel=self.zero_sentinel))

    def run(self) -> RunSummary:
        """
        Run every job and wait for all of them to finish.

        Returns:
            RunSummary: One AggregateResult per successful job, in completion
            order, plus a JobFailure for every job that produced none.
        """
        cfg = self.config
        print_header("Write Latency Benchmark")
        print_info(f"blocksize: {cfg.block_size}, filesize: {cfg.file_size}, "
                   f"numjobs: {cfg.num_jobs}, numtests: {cfg.num_tests}")
        self._check_space()

        slots = threading.BoundedSemaphore(cfg.num_jobs)
        results = queue.Queue(maxsize=cfg.num_tests)
        failures = queue.Queue(maxsize=cfg.num_tests)

        start_time = time.time()
        threads = []
        for job_id in range(cfg.num_tests):
            spec = JobSpec(job_id=job_id, block_size=cfg.block_size, file_size=cfg.file_size)
            thread = threading.Thread(
                target=self._run_job,
                args=(spec, slots, results, failures),
                name=f"write-job-{job_id}",
            )
            thread.start()
            threads.append(thread)

        # Wait for all jobs
        for thread in threads:
            thread.join()
        end_time = time.time()

        summary = RunSummary(
            num_tests=cfg.num_tests,
            num_jobs=cfg.num_jobs,
            block_size=cfg.block_size,
            file_size=cfg.file_size,
            duration_seconds=end_time - start_time,
            results=_drain(results),
            failures=_drain(failures),
        )
        self.results = summary.results
        print_success(f"Run completed in {summary.duration_seconds:.3f} seconds: "
                     f"{len(summary.results)} of {cfg.num_tests} jobs succeeded")
        return summary


def _drain(q):
    items = []
    while True:
        try:
            items.append(q.get_nowait())
        except queue.Empty:
            return items
