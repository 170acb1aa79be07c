"""
Timed, chunked write of a single benchmark file.
"""

import os
import time
import uuid
from dataclasses import dataclass
from typing import List, Optional

from core.errors import BlockWriteError
from utils import print_warning

ARTIFACT_PREFIX = "benchmark_file_"

# Smallest elapsed time a chunk write can report. A reading of exactly zero
# means the write finished inside one clock tick.
CLOCK_RESOLUTION = time.get_clock_info("perf_counter").resolution


@dataclass(frozen=True)
class Sample:
    """Measured throughput and latency of one chunk write."""
    throughput_kbps: float
    latency_ms: float


def artifact_name(job_id: int) -> str:
    """Build the file name for a job: id, second timestamp and a random suffix."""
    return f"{ARTIFACT_PREFIX}{job_id}_{int(time.time())}_{uuid.uuid4().hex[:8]}"


def open_artifact(path: str, sync: bool = True):
    """
    Create a job's output file for unbuffered sequential writing.

    The file must not already exist. With sync enabled the file is opened
    O_SYNC where the platform supports it so each chunk reaches the device
    before write() returns.
    """
    flags = os.O_CREAT | os.O_EXCL | os.O_WRONLY | getattr(os, "O_BINARY", 0)
    if sync:
        flags |= getattr(os, "O_SYNC", 0)
    fd = os.open(path, flags, 0o644)
    return os.fdopen(fd, "wb", buffering=0)


def remove_artifact(path: str) -> bool:
    """
    Delete an output file, reporting but never raising on failure.

    Returns:
        bool: True if the file is gone afterwards.
    """
    try:
        os.remove(path)
    except FileNotFoundError:
        return True
    except OSError as e:
        print_warning(f"Failed to remove file {path}: {e}")
        return False
    return True


def _timed_write(handle, chunk) -> tuple:
    start = time.perf_counter()
    written = handle.write(chunk)
    elapsed = time.perf_counter() - start
    return written, elapsed


def write_blocks(file_size: int, handle, block_size: int, path: Optional[str] = None) -> List[Sample]:
    """
    Write file_size bytes to handle in block_size chunks, timing each write.

    Args:
        file_size: Total bytes to write
        handle: Open, writable binary file object
        block_size: Bytes per chunk; the last chunk carries the remainder
        path: Path of the file behind handle, removed if a write fails

    Returns:
        list: One Sample per chunk write, in write order.

    Raises:
        BlockWriteError: A write failed. The handle is closed and the partial
            file removed before raising.
    """
    # Never more than file_size bytes are sliced from the buffer
    buffer = memoryview(bytes(min(block_size, file_size)))
    samples = []
    total_written = 0

    while total_written < file_size:
        write_size = min(block_size, file_size - total_written)
        try:
            written, elapsed = _timed_write(handle, buffer[:write_size])
        except OSError as e:
            _abort(handle, path)
            raise BlockWriteError(path, total_written, e) from e
        if not written:
            _abort(handle, path)
            raise BlockWriteError(path, total_written, OSError("device accepted no bytes"))

        if elapsed <= 0:
            elapsed = CLOCK_RESOLUTION
        samples.append(Sample(
            throughput_kbps=written / 1000 / elapsed,
            latency_ms=elapsed * 1000,
        ))
        total_written += written

    return samples


def _abort(handle, path):
    """Close the handle and drop the partial file after a failed write."""
    try:
        handle.close()
    except OSError as e:
        print_warning(f"Failed to close {path or 'output file'}: {e}")
    if path is not None:
        remove_artifact(path)
