"""
Command-line interface for write-bench.
"""

import argparse
import sys

from benchmarks import WriteLatencyBenchmark
from core.config import BenchmarkConfig, build_config, load_config_file
from core.errors import ConfigError
from core.report import print_results
from utils import print_error, print_info

_DEFAULTS = BenchmarkConfig()


def build_parser():
    """Build the argument parser with all CLI options."""
    parser = argparse.ArgumentParser(
        description='write-bench - disk write throughput/latency micro-benchmark',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  Four 1 MiB files in 4K chunks, two at a time:
    write-bench --blocksize 4096 --filesize 1048576 --numjobs 2 --numtests 4

  Parameters from a file, overriding the job count:
    write-bench --config bench.yaml --numjobs 8
"""
    )

    # Defaults are applied in resolve_config so a config file can fill in
    # anything not given explicitly on the command line.
    parser.add_argument('--blocksize', type=int, default=None,
                        help=f'Blocksize in bytes (default: {_DEFAULTS.block_size})')
    parser.add_argument('--filesize', type=int, default=None,
                        help=f'Filesize in bytes (default: {_DEFAULTS.file_size})')
    parser.add_argument('--numjobs', type=int, default=None,
                        help=f'The number of jobs to run in parallel (default: {_DEFAULTS.num_jobs})')
    parser.add_argument('--numtests', type=int, default=None,
                        help=f'The number of times to run the test (default: {_DEFAULTS.num_tests})')
    parser.add_argument('--directory', type=str, default=None,
                        help='Directory to create benchmark files in (default: current directory)')
    parser.add_argument('--no-sync', dest='sync', action='store_false', default=None,
                        help='Open benchmark files without O_SYNC')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to JSON or YAML file with block_size, file_size, '
                             'num_jobs, num_tests, directory, sync')
    return parser


def resolve_config(args):
    """
    Merge defaults, the optional config file, and explicit CLI flags.

    Raises:
        ConfigError: Config file unreadable or any value invalid.
    """
    values = {}
    if args.config:
        values.update(load_config_file(args.config))

    overrides = {
        "block_size": args.blocksize,
        "file_size": args.filesize,
        "num_jobs": args.numjobs,
        "num_tests": args.numtests,
        "directory": args.directory,
        "sync": args.sync,
    }
    values.update({k: v for k, v in overrides.items() if v is not None})
    return build_config(values)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = resolve_config(args)
    except ConfigError as e:
        print_error("Invalid configuration:")
        for err in e.errors:
            print_error(f"  • {err}")
        return 1

    benchmark = WriteLatencyBenchmark(config)
    if not benchmark.validate():
        print_error(f"Directory {config.directory} does not exist or is not writable")
        return 1

    summary = benchmark.run()

    print_results(summary)
    if summary.failures:
        print_info("Failed jobs are excluded from the results above.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
