import math
import unittest

from lumen.values import Number, Text, Boolean, NIL, TRUE, FALSE, lift
from lumen.presentation import is_truthy, is_equal, stringify

class Truthiness(unittest.TestCase):

	def test_only_nil_and_false_are_false(self):
		for value, expect in [
			(NIL, False),
			(FALSE, False),
			(TRUE, True),
			(Number(0), True),
			(Number(-1.5), True),
			(Text(""), True),
			(Text("false"), True),
		]:
			with self.subTest(value):
				self.assertIs(expect, is_truthy(value))

class Equality(unittest.TestCase):

	def test_nil(self):
		self.assertTrue(is_equal(NIL, NIL))
		self.assertFalse(is_equal(NIL, Number(0)))
		self.assertFalse(is_equal(Text(""), NIL))
		self.assertFalse(is_equal(NIL, FALSE))

	def test_same_kind_compares_content(self):
		self.assertTrue(is_equal(Number(3), Number(3.0)))
		self.assertFalse(is_equal(Number(3), Number(4)))
		self.assertTrue(is_equal(Text("ab"), Text("a"+"b")))
		self.assertFalse(is_equal(Text("ab"), Text("ba")))
		self.assertTrue(is_equal(TRUE, Boolean(True)))
		self.assertFalse(is_equal(TRUE, FALSE))

	def test_no_coercion_across_kinds(self):
		for a, b in [
			(Number(1), TRUE),
			(Number(0), FALSE),
			(Number(1), Text("1")),
			(Text("true"), TRUE),
		]:
			with self.subTest(a=a, b=b):
				self.assertFalse(is_equal(a, b))
				self.assertFalse(is_equal(b, a))

	def test_numbers_compare_as_exact_doubles(self):
		self.assertTrue(is_equal(Number(math.nan), Number(math.nan)))
		self.assertTrue(is_equal(Number(math.nan), Number(-math.nan)))
		self.assertFalse(is_equal(Number(math.nan), Number(0)))
		self.assertFalse(is_equal(Number(0.0), Number(-0.0)))
		self.assertTrue(is_equal(Number(-0.0), Number(-0.0)))
		self.assertTrue(is_equal(Number(math.inf), Number(math.inf)))

class Stringify(unittest.TestCase):

	def test_numbers_drop_trailing_point_zero(self):
		for n, text in [
			(4.0, "4"),
			(4.5, "4.5"),
			(0, "0"),
			(-3, "-3"),
			(0.1, "0.1"),
			(0.1 + 0.2, "0.30000000000000004"),
			(123456789, "123456789"),
			(-0.0, "-0"),
		]:
			with self.subTest(n):
				self.assertEqual(text, stringify(Number(n)))

	def test_non_finite_numbers(self):
		self.assertEqual("Infinity", stringify(Number(math.inf)))
		self.assertEqual("-Infinity", stringify(Number(-math.inf)))
		self.assertEqual("NaN", stringify(Number(math.nan)))

	def test_exponents_follow_python(self):
		for n, text in [
			(1e21, "1e+21"),
			(1e-7, "1e-07"),
			(-2.5e100, "-2.5e+100"),
		]:
			with self.subTest(n):
				self.assertEqual(text, stringify(Number(n)))

	def test_other_kinds(self):
		self.assertEqual("nil", stringify(NIL))
		self.assertEqual("true", stringify(TRUE))
		self.assertEqual("false", stringify(FALSE))
		self.assertEqual("hello", stringify(Text("hello")))
		self.assertEqual("", stringify(Text("")))

class Values(unittest.TestCase):

	def test_numbers_are_doubles(self):
		self.assertIsInstance(Number(4).value, float)
		self.assertEqual(Number(4), Number(4.0))

	def test_variants_do_not_mix(self):
		self.assertNotEqual(Number(1), TRUE)
		self.assertNotEqual(Number(0), NIL)

	def test_values_are_immutable(self):
		with self.assertRaises(AttributeError):
			Number(1).value = 2.0

	def test_lift(self):
		self.assertIs(NIL, lift(None))
		self.assertIs(TRUE, lift(True))
		self.assertEqual(Number(2), lift(2))
		self.assertEqual(Text("x"), lift("x"))
		with self.assertRaises(TypeError):
			lift([1, 2])
