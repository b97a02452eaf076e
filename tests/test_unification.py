import unittest

from polytype.algebra import Kind, TypeVariable, TypeOperator, INT, BOOL, function, pair
from polytype.substitution import definitive, apply
from polytype.unification import unify, unify_pair, TypeMismatch, RecursiveUnification

a, b, c, d = (TypeVariable(i) for i in range(4))

class DefinitiveFormTests(unittest.TestCase):

	def test_unbound_variable_stands_for_itself(self):
		self.assertEqual(a, definitive({}, a))

	def test_follows_the_chain(self):
		gamma = {a: b, b: c, c: INT}
		self.assertEqual(INT, definitive(gamma, a))

	def test_stops_at_first_unbound_variable(self):
		gamma = {a: b, b: c}
		self.assertEqual(c, definitive(gamma, a))

	def test_stops_at_first_operator(self):
		gamma = {a: function(b, c), b: INT}
		self.assertEqual(function(b, c), definitive(gamma, a))

	def test_apply_rewrites_all_the_way_down(self):
		gamma = {a: function(b, INT), b: BOOL}
		self.assertEqual(pair(function(BOOL, INT), d), apply(gamma, pair(a, d)))


class UnifyTests(unittest.TestCase):

	def setUp(self) -> None:
		self.gamma = {}

	def resolve(self, term):
		return apply(self.gamma, term)

	def test_function_with_function_unifies_components(self):
		unify_pair(function(a, b), function(INT, BOOL), self.gamma)
		self.assertEqual(INT, definitive(self.gamma, a))
		self.assertEqual(BOOL, definitive(self.gamma, b))

	def test_variables_come_to_mean_the_same(self):
		unify_pair(a, b, self.gamma)
		self.assertEqual(self.resolve(a), self.resolve(b))

	def test_same_variable_is_no_constraint(self):
		unify_pair(a, a, self.gamma)
		self.assertEqual({}, self.gamma)

	def test_component_disagreement_is_a_mismatch(self):
		with self.assertRaises(TypeMismatch):
			unify_pair(function(a, a), function(INT, BOOL), self.gamma)

	def test_pair_versus_function_is_a_mismatch(self):
		with self.assertRaises(TypeMismatch) as cm:
			unify_pair(pair(a, b), function(c, d), self.gamma)
		kinds = {cm.exception.x.kind.name, cm.exception.y.kind.name}
		self.assertEqual({"pair", "function"}, kinds)

	def test_base_types_mismatch(self):
		with self.assertRaises(TypeMismatch):
			unify_pair(INT, BOOL, self.gamma)

	def test_arity_must_agree(self):
		triple = TypeOperator(Kind("tuple", 3), (a, b, c))
		double = TypeOperator(Kind("tuple", 2), (INT, INT))
		with self.assertRaises(TypeMismatch):
			unify_pair(triple, double, self.gamma)

	def test_extensible_kinds_unify_structurally(self):
		listof = Kind("list", 1)
		unify_pair(TypeOperator(listof, (a,)), TypeOperator(listof, (INT,)), self.gamma)
		self.assertEqual(INT, definitive(self.gamma, a))

	def test_occurs_check(self):
		for lhs, rhs in [
			(a, function(a, INT)),
			(function(a, INT), a),
			(a, pair(INT, pair(a, b))),
		]:
			with self.subTest(lhs=lhs, rhs=rhs):
				with self.assertRaises(RecursiveUnification) as cm:
					unify_pair(lhs, rhs, {})
				self.assertEqual(a, cm.exception.x)

	def test_occurs_check_sees_through_the_substitution(self):
		unify_pair(b, function(a, INT), self.gamma)
		with self.assertRaises(RecursiveUnification):
			unify_pair(a, b, self.gamma)

	def test_self_unification_changes_nothing(self):
		unify_pair(a, function(b, INT), self.gamma)
		unify_pair(c, BOOL, self.gamma)
		before = {v: self.resolve(v) for v in (a, b, c, d)}
		term = function(a, pair(c, d))
		unify_pair(term, term, self.gamma)
		self.assertEqual(before, {v: self.resolve(v) for v in (a, b, c, d)})

	def test_prior_bindings_still_count(self):
		unify_pair(a, INT, self.gamma)
		with self.assertRaises(TypeMismatch):
			unify_pair(a, BOOL, self.gamma)

	def test_several_constraints_at_once(self):
		unify([(a, INT), (b, pair(a, a))], self.gamma)
		self.assertEqual(pair(INT, INT), self.resolve(b))

	def test_substitution_values_stay_solved(self):
		unify([(b, function(a, a)), (a, INT)], self.gamma)
		self.assertEqual(function(INT, INT), self.gamma[b])
		for value in self.gamma.values():
			self.assertFalse(any(value.mentions(k) for k in self.gamma))

	def test_failure_carries_the_stem(self):
		stem = object()
		with self.assertRaises(TypeMismatch) as cm:
			unify_pair(INT, BOOL, self.gamma, stem)
		self.assertIs(stem, cm.exception.at)


if __name__ == '__main__':
	unittest.main()
