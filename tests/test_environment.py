import unittest

from polytype.algebra import INT, BOOL
from polytype.environment import TypeEnvironment
from polytype import primitive

class EnvironmentTests(unittest.TestCase):

	def setUp(self) -> None:
		self.env = TypeEnvironment({"x": INT})

	def test_ids_count_up(self):
		first, second = self.env.fresh_variable(), self.env.fresh_variable()
		self.assertLess(first, second)
		self.assertEqual(second.nr + 1, self.env.unique_id())

	def test_bind_then_restore_prior(self):
		with self.env.bind("x", BOOL):
			self.assertEqual(BOOL, self.env["x"])
		self.assertEqual(INT, self.env["x"])

	def test_bind_then_remove_absent(self):
		with self.env.bind("y", BOOL):
			self.assertIn("y", self.env)
		self.assertNotIn("y", self.env)

	def test_restores_even_on_failure(self):
		with self.assertRaises(ZeroDivisionError):
			with self.env.bind("x", BOOL):
				with self.env.bind("y", BOOL):
					1 / 0
		self.assertEqual(INT, self.env["x"])
		self.assertEqual(["x"], list(self.env))

	def test_nested_shadowing(self):
		v = self.env.fresh_variable()
		with self.env.bind("x", BOOL):
			with self.env.bind("x", v):
				self.assertEqual(v, self.env["x"])
			self.assertEqual(BOOL, self.env["x"])
		self.assertEqual(INT, self.env["x"])


class PrimitiveTests(unittest.TestCase):

	def test_builtins_are_present(self):
		env = primitive.environment()
		self.assertEqual({"pair", "true", "cond", "zero", "pred", "times"}, set(env))
		self.assertEqual(BOOL, env["true"])

	def test_builtin_variables_come_from_the_counter(self):
		env = primitive.environment()
		seen = set()
		env["pair"].poll(seen)
		env["cond"].poll(seen)
		self.assertEqual(3, len(seen))
		self.assertTrue(all(v.nr < 3 for v in seen))
		self.assertEqual(3, env.unique_id())


if __name__ == '__main__':
	unittest.main()
