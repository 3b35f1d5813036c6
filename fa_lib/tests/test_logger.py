"""
Tests for the JSON logger.
"""

import json
import logging
import os
import tempfile
import unittest

import numpy as np

from fa_lib.config import ApproximatorSettings
from fa_lib.function_approx import FunctionApproximator
from fa_lib.logging import JsonFormatter, get_logger, reset_logger, setup_logger


def _record(msg, **extra):
    record = logging.LogRecord("fa_lib", logging.INFO, __file__, 10, msg, None, None)
    for k, v in extra.items():
        setattr(record, k, v)
    return record


class TestJsonFormatter(unittest.TestCase):
    """Test cases for JsonFormatter."""
    
    def test_dict_message(self):
        out = json.loads(JsonFormatter().format(_record({
            "event": "x",
            "weights": np.array([1.0, 2.0]),
            "count": np.int64(3),
        })))
        self.assertEqual(out["level"], "INFO")
        self.assertEqual(out["data"], {"event": "x", "weights": [1.0, 2.0], "count": 3})
    
    def test_text_message_with_data(self):
        out = json.loads(JsonFormatter().format(_record("hello", data={"v": np.float32(0.5)})))
        self.assertEqual(out["message"], "hello")
        self.assertEqual(out["data"], {"v": 0.5})
    
    def test_large_array_is_sampled(self):
        out = json.loads(JsonFormatter().format(_record({"w": np.zeros(200)})))
        self.assertTrue(out["data"]["w"].startswith("ndarray(200)"))


class TestSetupLogger(unittest.TestCase):
    """Test cases for logger configuration."""
    
    def setUp(self):
        reset_logger()
    
    def tearDown(self):
        reset_logger()
    
    def test_default_is_quiet(self):
        logger = get_logger()
        self.assertEqual(logger.level, logging.WARNING)
        self.assertFalse(any(isinstance(h, logging.FileHandler) for h in logger.handlers))
    
    def test_configured_once(self):
        self.assertIs(setup_logger(), setup_logger(debug=True))
    
    def test_debug_writes_json_lines(self):
        with tempfile.TemporaryDirectory() as tmp:
            setup_logger(debug=True, log_level="debug", log_file="run.json", log_dir=tmp)
            
            fa = FunctionApproximator(lambda: 0.5)
            fa.add_value_function(fa.create_value_function(lambda s: 1.0))
            fa.correct(None, 1.0)
            reset_logger()
            
            with open(os.path.join(tmp, "run.json")) as f:
                events = [json.loads(line)["data"]["event"] for line in f]
        
        self.assertEqual(events, ["logger_initialized", "correction"])
    
    def test_settings_setup_logging(self):
        with tempfile.TemporaryDirectory() as tmp:
            log_file = os.path.join(tmp, "settings.json")
            logger = ApproximatorSettings(debug=True, log_level="warning", log_file=log_file).setup_logging()
            self.assertEqual(logger.level, logging.WARNING)
            reset_logger()
            self.assertTrue(os.path.exists(log_file))
    
    def test_from_settings_configures_logger(self):
        with tempfile.TemporaryDirectory() as tmp:
            log_file = os.path.join(tmp, "approximator.json")
            settings = ApproximatorSettings(debug=True, log_level="debug", log_file=log_file)
            
            fa = FunctionApproximator.from_settings(settings)
            fa.add_value_function(fa.create_value_function(lambda s: 1.0))
            fa.correct(None, 2.0)
            self.assertEqual(get_logger().level, logging.DEBUG)
            reset_logger()
            
            with open(log_file) as f:
                events = [json.loads(line)["data"]["event"] for line in f]
        
        self.assertEqual(events, ["logger_initialized", "correction"])


if __name__ == '__main__':
    unittest.main()
