"""
The unification approach to type-inference.

Given some equations between type terms, find the substitution that makes
each side of every equation the same, or else explain why there isn't one.
"""
from typing import Iterable, Tuple
from .ontology import InferenceError, ValueExpression
from .algebra import Term, TypeVariable
from .substitution import Substitution

Constraint = Tuple[Term, Term]

class UnificationFailed(InferenceError):
	gripe: str
	def __init__(self, x:Term, y:Term, at:ValueExpression=None):
		super().__init__(self.gripe, x, y)
		self.x, self.y, self.at = x, y, at

class TypeMismatch(UnificationFailed):
	gripe = "type mismatch"

class RecursiveUnification(UnificationFailed):
	""" x would have to be part of y, but a type cannot be part of itself. """
	gripe = "recursive unification"


def unify(constraints: Iterable[Constraint], gamma: Substitution, stem:ValueExpression=None, report=None):
	"""
	Extend gamma (in place) so that both sides of every constraint agree.
	On failure, gamma is left half-done; the caller should give up on it.
	"""
	Unifier(constraints, gamma, stem, report).solve()

def unify_pair(x:Term, y:Term, gamma: Substitution, stem:ValueExpression=None, report=None):
	""" Often there is only the one constraint. """
	unify([(x, y)], gamma, stem, report)


class Unifier:
	"""
	A worklist algorithm. Invariant: nothing on the stack and no value in gamma
	mentions any variable which is a key in gamma. So the occurs-check can look
	at raw terms and still see their resolved structure.
	"""

	def __init__(self, constraints: Iterable[Constraint], gamma: Substitution, stem, report):
		self._stack = list(constraints)
		# Prior bindings go back on the stack, to be re-checked alongside the new ones.
		self._stack.extend(gamma.items())
		gamma.clear()
		self._gamma = gamma
		self._stem = stem
		self._report = report

	def solve(self):
		while self._stack:
			x, y = self._stack.pop()
			self._step(x, y)

	def _step(self, x:Term, y:Term):
		if isinstance(x, TypeVariable):
			if x == y:
				return
			if y.mentions(x):
				raise RecursiveUnification(x, y, self._stem)
			self._eliminate(x, y)
		elif isinstance(y, TypeVariable):
			if x.mentions(y):
				raise RecursiveUnification(y, x, self._stem)
			self._eliminate(y, x)
		elif x.agrees_with(y):
			self._stack.extend(zip(x.args, y.args))
		else:
			raise TypeMismatch(x, y, self._stem)

	def _eliminate(self, x:TypeVariable, y:Term):
		if self._report is not None:
			self._report.debug("unify: eliminate", x, "=", y)
		self._stack = [(a.replace(x, y), b.replace(x, y)) for a, b in self._stack]
		gamma = self._gamma
		for key, value in gamma.items():
			gamma[key] = value.replace(x, y)
		gamma[x] = y
