import unittest
from math import comb

import ogrpy as og
from ogrpy import Ruler, GolombRuler
from ogrpy.exceptions import InvalidParameterError


class TestEnumerateRulers(unittest.TestCase):

    def test_with_length_3(self):
        rulers = og.enumerate_rulers_with_length(3)
        self.assertEqual(rulers, [Ruler([3]), Ruler([2, 3]), Ruler([1, 3]), Ruler([1, 2, 3])])
        self.assertEqual(sorted(r.order() for r in rulers), [2, 3, 3, 4])

    def test_with_length_degenerate(self):
        self.assertEqual(og.enumerate_rulers_with_length(0), [Ruler()])
        self.assertEqual(og.enumerate_rulers_with_length(1), [Ruler([1])])
        with self.assertRaises(InvalidParameterError):
            og.enumerate_rulers_with_length(-1)

    def test_enumerate_rulers(self):
        rulers = og.enumerate_rulers(4)
        self.assertEqual(len(rulers), 2 + 4 + 8)
        self.assertEqual([r.length() for r in rulers], [2] * 2 + [3] * 4 + [4] * 8)
        self.assertEqual(og.enumerate_rulers(1), [])

    def test_with_order(self):
        rulers = og.enumerate_rulers_with_order(3, 5)
        self.assertEqual(len(rulers), 1 + 2 + 3 + 4)
        self.assertTrue(all(r.order() == 3 for r in rulers))

    def test_counts(self):
        for length in range(0, 12):
            self.assertEqual(og.count_rulers(length), len(og.enumerate_rulers_with_length(length)))
        self.assertEqual(og.count_rulers_with_order(4, 20), comb(19, 2))
        self.assertEqual(og.count_rulers_with_order(1, 0), 1)
        self.assertEqual(og.count_rulers_with_order(2, 0), 0)
        self.assertEqual(og.count_rulers_with_order(2, 1), 1)


class TestEnumeratePruned(unittest.TestCase):

    def test_order_2(self):
        rulers = og.enumerate_pruned_rulers(order=2, length=3)
        self.assertEqual(rulers, [Ruler([3])])
        self.assertEqual(str(rulers[0]), "[0, 3]")

    def test_small_orders(self):
        self.assertEqual(og.enumerate_pruned_rulers(1, 5), [])
        self.assertEqual(og.enumerate_pruned_rulers(0, 5), [])
        self.assertEqual(og.enumerate_pruned_rulers(1, 0), [Ruler()])
        self.assertEqual(og.enumerate_pruned_rulers(2, 1), [Ruler([1])])
        self.assertEqual(og.enumerate_pruned_rulers(3, 1), [])

    def test_pruned_counts(self):
        for length in [10, 12]:
            all_rulers = og.enumerate_rulers_with_length(length)
            for order in range(1, length + 3):
                filtered = [r for r in all_rulers if r.order() == order]
                pruned = og.enumerate_pruned_rulers(order, length)
                self.assertEqual(len(pruned), len(filtered))
                self.assertEqual(len(pruned), og.count_rulers_with_order(order, length))
                self.assertEqual(set(pruned), set(filtered))

    def test_pruned_20(self):
        self.assertEqual(len(og.enumerate_pruned_rulers(5, 20)), comb(19, 3))


class TestEnumerateGolomb(unittest.TestCase):

    def test_golomb_with_length(self):
        rulers = og.enumerate_golomb_rulers_with_length(4, 6)
        self.assertEqual(rulers, [Ruler([2, 5, 6]), Ruler([1, 4, 6])])
        self.assertTrue(all(isinstance(r, GolombRuler) for r in rulers))
        self.assertEqual(og.enumerate_golomb_rulers_with_length(4, 5), [])

    def test_golomb_order_2(self):
        self.assertEqual(og.enumerate_golomb_rulers(2, 4), [Ruler([2]), Ruler([3]), Ruler([4])])
        self.assertEqual(og.enumerate_golomb_rulers_pruned(2, 4), [Ruler([2]), Ruler([3]), Ruler([4])])

    def test_golomb_exhaustive_vs_pruned(self):
        for order in range(2, 6):
            exhaustive = og.enumerate_golomb_rulers(order, 11)
            pruned = og.enumerate_golomb_rulers_pruned(order, 11)
            self.assertEqual(exhaustive, pruned, f"order {order}")
            self.assertTrue(all(r.order() == order and r.is_golomb_ruler() for r in pruned))

    def test_golomb_pruned_with_length(self):
        rulers = og.enumerate_golomb_rulers_pruned_with_length(4, 6)
        self.assertEqual(rulers, og.enumerate_golomb_rulers_with_length(4, 6))

    def test_optimal_order_5(self):
        # the shortest Golomb rulers with 5 marks have length 11
        self.assertEqual(og.enumerate_golomb_rulers_pruned(5, 10), [])
        rulers = og.enumerate_golomb_rulers_pruned_with_length(5, 11)
        self.assertIn(Ruler([1, 4, 9, 11]), rulers)
        self.assertIn(Ruler([2, 7, 8, 11]), rulers)
        # closed under mirroring
        for r in rulers:
            mirrored = Ruler(sorted(11 - m for m in r.full_marks()[:-1]))
            self.assertIn(mirrored, rulers)

    def test_depth(self):
        for order in range(3, 6):
            depth = og.enumerate_golomb_rulers_depth(order, 11)
            golomb = og.enumerate_golomb_rulers_pruned(order, 11)
            self.assertTrue(set(golomb) <= set(depth))
            self.assertEqual([r for r in depth if r.is_golomb_ruler()], golomb)

    def test_depth_with_length(self):
        rulers = og.enumerate_golomb_rulers_depth_with_length(4, 7)
        self.assertEqual(rulers[0], Ruler([5, 6, 7]))
        self.assertTrue(all(r.is_golomb_ruler_order_1() for r in rulers))
        self.assertEqual(og.enumerate_golomb_rulers_depth_with_length(2, 7), [Ruler([7])])

    def test_depth_parameter(self):
        with self.assertRaises(InvalidParameterError):
            og.enumerate_golomb_rulers_depth(4, 8, depth=0)
        with self.assertWarns(UserWarning):
            og.enumerate_golomb_rulers_depth_with_length(4, 8, depth=3)
