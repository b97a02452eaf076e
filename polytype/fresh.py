"""
This is where let-polymorphism comes from.

Each use of a name gets its own copy of that name's type. The copy has fresh
variables in place of the generic ones, and keeps the non-generic ones:
those fixed by some enclosing lambda-parameter or letrec-in-progress.
"""
from typing import AbstractSet, Dict
from .algebra import Term, TermVisitor, TypeVariable, TypeOperator
from .substitution import Substitution, definitive, apply
from .environment import TypeEnvironment

class FreshMaker(TermVisitor):
	"""
	One of these per instantiation. Within one, the same generic variable
	always maps to the same fresh variable, so the copy keeps its internal sharing.
	"""

	def __init__(self, env: TypeEnvironment, non_generic: AbstractSet[TypeVariable], gamma: Substitution):
		self._env = env
		self._non_generic = non_generic
		self._gamma = gamma
		self.mappings: Dict[TypeVariable, TypeVariable] = {}

	def __call__(self, typ: Term) -> Term:
		# See through any variable the unifier has already pinned down.
		return definitive(self._gamma, typ).visit(self)

	def on_variable(self, v: TypeVariable):
		if not self.is_generic(v):
			return v
		if v not in self.mappings:
			self.mappings[v] = self._env.fresh_variable()
		return self.mappings[v]

	def on_operator(self, op: TypeOperator):
		return TypeOperator(op.kind, [self(a) for a in op.args])

	def is_generic(self, v: TypeVariable) -> bool:
		return not any(apply(self._gamma, ng).mentions(v) for ng in self._non_generic)


def instantiate(typ: Term, env: TypeEnvironment, non_generic: AbstractSet[TypeVariable], gamma: Substitution) -> Term:
	return FreshMaker(env, non_generic, gamma)(typ)
