"""
write-bench Benchmarks Module

Available benchmarks:
- WriteLatencyBenchmark: concurrent chunked file writes timed per chunk

Building blocks:
- write_blocks: timed chunked write of one file
"""

from benchmarks.base import BenchmarkBase
from benchmarks.block_writer import Sample, write_blocks, open_artifact, remove_artifact, artifact_name
from benchmarks.write_latency import WriteLatencyBenchmark, JobSpec, JobFailure, RunSummary

__all__ = [
    'BenchmarkBase', 'Sample', 'write_blocks', 'open_artifact', 'remove_artifact', 'artifact_name',
    'WriteLatencyBenchmark', 'JobSpec', 'JobFailure', 'RunSummary',
]
