# ==============================================================================
# File: tests/test_config.py
# Purpose: Config loading: defaults, JSON files, overrides and validation.
# ==============================================================================
import json
import os
import sys
import tempfile
import unittest
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from noise_rng.config import DEFAULT_CONFIG, RngConfig, deep_merge, load_config
from noise_rng.core.errors import ConfigError


class TestLoadConfig(unittest.TestCase):

    def test_defaults(self):
        cfg = load_config()
        self.assertIsInstance(cfg, RngConfig)
        self.assertEqual(cfg.seed, DEFAULT_CONFIG["seed"])
        self.assertEqual(cfg.workers, 1)
        self.assertEqual(cfg.log_level, "INFO")
        self.assertIsNone(cfg.log_file)

    def test_dict_source_and_overrides(self):
        cfg = load_config({"seed": 42, "logging": {"level": "debug"}}, {"count": 5})
        self.assertEqual(cfg.seed, 42)
        self.assertEqual(cfg.count, 5)
        self.assertEqual(cfg.log_level, "DEBUG")
        self.assertEqual(cfg.block_size, DEFAULT_CONFIG["block_size"])

    def test_json_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "rng.json")
            with open(path, "w", encoding="utf-8") as f:
                json.dump({"seed": 7, "start_position": 100, "workers": 3}, f)
            cfg = load_config(path)
        self.assertEqual((cfg.seed, cfg.start_position, cfg.workers), (7, 100, 3))

    def test_round_trip_through_to_dict(self):
        cfg = load_config({"seed": 9, "logging": {"file": "logs/rng.log"}})
        self.assertEqual(load_config(cfg.to_dict()), cfg)

    def test_missing_file(self):
        with self.assertRaises(ConfigError):
            load_config("/nonexistent/rng.json")

    def test_invalid_json(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "bad.json")
            with open(path, "w", encoding="utf-8") as f:
                f.write("{not json")
            with self.assertRaises(ConfigError):
                load_config(path)

    def test_validation_failures(self):
        bad = [
            {"seed": -1},
            {"seed": 1 << 32},
            {"seed": "42"},
            {"start_position": 1 << 32},
            {"count": -5},
            {"workers": 0},
            {"block_size": 0},
            {"logging": {"level": "LOUD"}},
            {"logging": {"file": 3}},
        ]
        for data in bad:
            with self.assertRaises(ConfigError, msg=str(data)):
                load_config(data)

    def test_unsupported_source(self):
        with self.assertRaises(TypeError):
            load_config(42)


class TestDeepMerge(unittest.TestCase):

    def test_nested_merge_does_not_mutate(self):
        base = {"a": 1, "nested": {"x": 1, "y": 2}, "items": [1, 2]}
        merged = deep_merge(base, {"nested": {"y": 3}, "items": [9]})
        self.assertEqual(merged, {"a": 1, "nested": {"x": 1, "y": 3}, "items": [9]})
        self.assertEqual(base["nested"]["y"], 2)


if __name__ == "__main__":
    unittest.main()
