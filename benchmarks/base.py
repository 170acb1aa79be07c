"""
Base class for write-bench benchmarks.
All benchmarks must inherit from this class.
"""

from abc import ABC, abstractmethod


class BenchmarkBase(ABC):
    """Abstract base class for all write-bench benchmarks."""

    name: str = ""
    description: str = ""

    @abstractmethod
    def validate(self) -> bool:
        """
        Check if prerequisites are met for this benchmark.

        Returns:
            bool: True if benchmark can run, False otherwise.
        """
        pass

    @abstractmethod
    def run(self):
        """
        Execute the benchmark.

        Returns:
            Benchmark results.
        """
        pass

    @property
    @abstractmethod
    def space_required_bytes(self) -> int:
        """
        Get the peak disk space the benchmark needs while running.

        Returns:
            int: Space required in bytes.
        """
        pass
