"""
Core configuration, statistics and reporting for write-bench.
"""

from core.errors import WriteBenchError, ConfigError, BlockWriteError
from core.config import BenchmarkConfig, build_config, validate_config, load_config_file
from core.stats import AggregateResult, aggregate_samples
