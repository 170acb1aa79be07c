#!/usr/bin/env python3
"""
Tests for configuration validation, config files, and the CLI entry point.
"""

import json
import os
import sys
import tempfile

# Ensure we can import from the write-bench package
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from core.cli import build_parser, main, resolve_config
from core.config import BenchmarkConfig, build_config, load_config_file, validate_config
from core.errors import ConfigError


def test_defaults():
    config = build_config({})
    assert config == BenchmarkConfig(block_size=512, file_size=1024, num_jobs=4, num_tests=4,
                                     directory=".", sync=True)


def test_validate_rejects_bad_values():
    cases = [
        ({"block_size": 0}, "block_size must be greater than 0"),
        ({"file_size": 0}, "file_size must be greater than 0"),
        ({"file_size": -5}, "file_size must be greater than 0"),
        ({"num_jobs": 0}, "num_jobs must be at least 1"),
        ({"num_tests": 0}, "num_tests must be at least 1"),
        ({"block_size": "512"}, "block_size must be greater than 0"),
        ({"num_jobs": True}, "num_jobs must be at least 1"),
        ({"sync": "yes"}, "sync must be true or false"),
        ({"directory": ""}, "directory must be a non-empty path"),
        ({"bogus": 1}, "Unknown config key(s): bogus"),
    ]
    for values, expected in cases:
        errors = validate_config(values)
        assert len(errors) == 1, (values, errors)
        assert errors[0].startswith(expected), (values, errors)


def test_validate_collects_every_error():
    errors = validate_config({"block_size": 0, "file_size": 0, "num_jobs": 0, "num_tests": 0})
    assert len(errors) == 4


def test_build_config_raises():
    try:
        build_config({"file_size": 0})
    except ConfigError as e:
        assert e.errors == ["file_size must be greater than 0 (got 0)"]
    else:
        raise AssertionError("expected ConfigError")


def _write(tmp, name, text):
    path = os.path.join(tmp, name)
    with open(path, "w") as f:
        f.write(text)
    return path


def test_load_json_and_yaml():
    with tempfile.TemporaryDirectory() as tmp:
        json_path = _write(tmp, "bench.json", json.dumps({"block_size": 4096, "num_jobs": 2}))
        yaml_path = _write(tmp, "bench.yaml", "block_size: 4096\nnum_jobs: 2\nsync: false\n")
        plain_path = _write(tmp, "bench.conf", "file_size: 8192\n")

        assert load_config_file(json_path) == {"block_size": 4096, "num_jobs": 2}
        assert load_config_file(yaml_path) == {"block_size": 4096, "num_jobs": 2, "sync": False}
        assert load_config_file(plain_path) == {"file_size": 8192}


def test_load_errors():
    with tempfile.TemporaryDirectory() as tmp:
        bad_json = _write(tmp, "bad.json", "{not json")
        bad_yaml = _write(tmp, "bad.yml", "a: [1, 2\n")
        not_dict = _write(tmp, "list.yaml", "- 1\n- 2\n")
        for path in (bad_json, bad_yaml, not_dict, os.path.join(tmp, "missing.json")):
            try:
                load_config_file(path)
            except ConfigError:
                pass
            else:
                raise AssertionError(f"expected ConfigError for {path}")


def test_undecodable_config_file_exits_cleanly():
    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "bench.yaml")
        with open(path, "wb") as f:
            f.write(b"\xff\xfeblock_size: 4096\n")
        try:
            load_config_file(path)
        except ConfigError as e:
            assert "Could not read config file" in str(e)
        else:
            raise AssertionError("expected ConfigError")

        assert main(["--config", path, "--directory", tmp]) == 1
        assert os.listdir(tmp) == ["bench.yaml"]


def test_cli_flags_override_config_file():
    with tempfile.TemporaryDirectory() as tmp:
        path = _write(tmp, "bench.yaml", "block_size: 4096\nfile_size: 8192\nnum_jobs: 2\n")
        args = build_parser().parse_args(["--config", path, "--numjobs", "8", "--no-sync"])
        config = resolve_config(args)
        assert config.block_size == 4096
        assert config.file_size == 8192
        assert config.num_jobs == 8
        assert config.num_tests == 4
        assert config.sync is False


def test_main_rejects_zero_filesize_before_any_file():
    with tempfile.TemporaryDirectory() as tmp:
        code = main(["--filesize", "0", "--directory", tmp])
        assert code == 1
        assert os.listdir(tmp) == []


def test_main_rejects_missing_directory():
    with tempfile.TemporaryDirectory() as tmp:
        assert main(["--directory", os.path.join(tmp, "nope")]) == 1


def test_main_runs_and_cleans_up():
    with tempfile.TemporaryDirectory() as tmp:
        code = main(["--blocksize", "1000", "--filesize", "1024", "--numjobs", "2",
                     "--numtests", "3", "--directory", tmp, "--no-sync"])
        assert code == 0
        assert os.listdir(tmp) == []


def test_main_reports_every_job(capsys):
    with tempfile.TemporaryDirectory() as tmp:
        assert main(["--numtests", "3", "--directory", tmp, "--no-sync"]) == 0
    out = capsys.readouterr().out
    for job_id in range(3):
        assert f"ID: {job_id}" in out
    assert "Throughput_avg:" in out
    assert "Latency_worst:" in out
    assert "Jobs succeeded: 3" in out


if __name__ == "__main__":
    for name, fn in list(globals().items()):
        # Tests taking pytest fixtures only run under pytest
        if name.startswith("test_") and callable(fn) and not fn.__code__.co_argcount:
            fn()
            print(f"  ✓ {name}")
    print("ALL TESTS PASSED ✅")
