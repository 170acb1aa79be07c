#!/usr/bin/env python3
"""
write-bench - disk write throughput/latency micro-benchmark

Modular architecture with core functionality split into:
- utils: Console output helpers
- core: Configuration, statistics, reporting and the CLI
- benchmarks: Block writer and the concurrent write benchmark

This script is a thin launcher for core.cli.
"""

import sys

from core.cli import main

if __name__ == "__main__":
    sys.exit(main())
