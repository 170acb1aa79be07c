"""
Console presentation of write-bench results.
"""

from utils import print_header, print_section, print_bullet, print_info, print_warning, color_text


def format_result(result):
    """Format one AggregateResult as the three report lines."""
    return [
        f"ID: {result.job_id}",
        f"Throughput_avg: {result.throughput_avg:.3f} kb/s, "
        f"Throughput_best: {result.throughput_best:.3f} kb/s, "
        f"Throughput_worst: {result.throughput_worst:.3f} kb/s",
        f"Latency_avg: {result.latency_avg:.3f} ms, "
        f"Latency_best: {result.latency_best:.3f} ms, "
        f"Latency_worst: {result.latency_worst:.3f} ms",
    ]


def print_results(summary):
    """Print every successful job sorted by job id, then the run totals."""
    print_header("Write Latency Benchmark Results")

    for result in sorted(summary.results, key=lambda r: r.job_id):
        id_line, throughput_line, latency_line = format_result(result)
        print_section(id_line)
        print_bullet(color_text(throughput_line, "YELLOW"))
        print_bullet(color_text(latency_line, "GREEN"))

    print_section("Summary")
    print_info(f"Jobs requested: {summary.num_tests}")
    print_info(f"Jobs succeeded: {len(summary.results)}")
    if summary.failures:
        print_warning(f"Jobs failed: {len(summary.failures)}")
        for failure in sorted(summary.failures, key=lambda f: f.job_id):
            print_bullet(f"Job {failure.job_id} ({failure.stage}): {failure.error}")
    print_info(f"Total time: {summary.duration_seconds:.3f} seconds")
