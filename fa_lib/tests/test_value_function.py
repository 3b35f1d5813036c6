"""
Tests for single weighted features.
"""

import unittest

from fa_lib.function_approx import ValueFunction


class TestValueFunction(unittest.TestCase):
    """Test cases for ValueFunction."""
    
    def test_defaults(self):
        """Without arguments the value is 0 and the weight is 1."""
        vf = ValueFunction()
        self.assertEqual(vf.get_value(), 0)
        self.assertEqual(vf.get_value({"x": 5}), 0)
        self.assertEqual(vf.get_weight(), 1)
    
    def test_weight_initializer(self):
        """The initializer supplies the starting weight."""
        self.assertEqual(ValueFunction(None, lambda: 1).get_weight(), 1)
        self.assertEqual(ValueFunction(None, lambda: 1 * 3).get_weight(), 3)
    
    def test_initializer_called_once(self):
        calls = []
        
        def init():
            calls.append(1)
            return 0.25
        
        vf = ValueFunction(lambda s: s, init)
        vf.get_value(2)
        vf.correct(0.5, 1.0, 0.1, 2)
        vf.scale(2)
        self.assertEqual(len(calls), 1)
    
    def test_values_differ_per_state(self):
        vf = ValueFunction(lambda s: s["x"])
        self.assertEqual(vf.get_value({"x": 1}), 1)
        self.assertEqual(vf.get_value({"x": 2}), 2)
        self.assertEqual(vf({"x": 3}), 3)
    
    def test_weighted_value(self):
        """The value is the weight times the feature."""
        vf = ValueFunction(lambda s: s["x"], lambda: 0.5)
        self.assertEqual(vf.get_value({"x": 8}), 4)
        self.assertEqual(vf.gradient({"x": 8}), 8)
    
    def test_correct_lowers_weight(self):
        """An estimate above the target lowers the weight."""
        vf = ValueFunction(lambda s: s["x"], lambda: 0.5)
        state = {"x": 8}
        value = vf.get_value(state)
        self.assertEqual(value, 4)
        
        vf.correct(value, 2, 0.1, state)
        
        self.assertAlmostEqual(vf.get_weight(), -1.1)
    
    def test_correct_raises_weight(self):
        """An estimate below the target raises the weight."""
        vf = ValueFunction(lambda s: s["x"], lambda: 0.5)
        state = {"x": 8}
        value = vf.get_value(state)
        
        vf.correct(value, 6, 0.1, state)
        
        self.assertAlmostEqual(vf.get_weight(), 2.1)
    
    def test_correct_uses_supplied_current_value(self):
        """The current value is taken as given, not recomputed."""
        vf = ValueFunction(lambda s: 1.0, lambda: 0.0)
        vf.correct(10.0, 0.0, 0.5, None)
        self.assertAlmostEqual(vf.get_weight(), -5.0)
    
    def test_correct_at_target_is_noop(self):
        vf = ValueFunction(lambda s: 3.0, lambda: 0.7)
        vf.correct(2.1, 2.1, 0.1, None)
        self.assertEqual(vf.get_weight(), 0.7)
    
    def test_scale(self):
        vf = ValueFunction(lambda s: 1, lambda: 1)
        vf.scale(0.5)
        self.assertEqual(vf.get_weight(), 0.5)
    
    def test_scale_composes(self):
        a = ValueFunction(lambda s: 1, lambda: 0.8)
        b = ValueFunction(lambda s: 1, lambda: 0.8)
        a.scale(0.5)
        a.scale(3.0)
        b.scale(0.5 * 3.0)
        self.assertAlmostEqual(a.get_weight(), b.get_weight())
    
    def test_feature_errors_propagate(self):
        def broken(state):
            raise KeyError("missing feature")
        
        vf = ValueFunction(broken)
        with self.assertRaises(KeyError):
            vf.get_value({})
        with self.assertRaises(KeyError):
            vf.correct(1.0, 0.0, 0.1, {})
        self.assertEqual(vf.get_weight(), 1)
    
    def test_initializer_errors_propagate(self):
        def broken():
            raise RuntimeError("no weight")
        
        with self.assertRaises(RuntimeError):
            ValueFunction(lambda s: 1, broken)


if __name__ == '__main__':
    unittest.main()
