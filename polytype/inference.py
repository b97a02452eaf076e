"""
Hindley-Milner type inference, driven by a walk over the expression tree.

The pattern here is that visiting an expression yields that expression's type.
Along the way, the engine grows a substitution and tracks which type variables
are non-generic: those bound by an enclosing lambda or a letrec in progress.
Both are private to one call of `infer`; only the environment outlives it.
"""
from contextlib import contextmanager
from typing import Set
from boozetools.support.foundation import Visitor
from . import syntax
from .ontology import InferenceError, ValueExpression
from .algebra import Term, TypeVariable, INT, BOOL, function
from .substitution import Substitution, definitive, apply
from .unification import unify_pair
from .environment import TypeEnvironment
from .fresh import instantiate
from .diagnostics import Report

class UndefinedSymbol(InferenceError):
	def __init__(self, name:str, at:ValueExpression=None):
		super().__init__("undefined symbol", name)
		self.name, self.at = name, at


def infer(expr:ValueExpression, env:TypeEnvironment, report:Report=None) -> Term:
	"""
	The type of `expr` in `env`, as general as possible.
	Raises some kind of InferenceError if there is no such type.
	"""
	engine = DeductionEngine(env, report or Report(verbose=0))
	return engine.result(expr)


class DeductionEngine(Visitor):
	_gamma: Substitution
	_non_generic: Set[TypeVariable]

	def __init__(self, env:TypeEnvironment, report:Report):
		self._env = env
		self._report = report
		self._gamma = {}
		self._non_generic = set()

	def result(self, expr:ValueExpression) -> Term:
		return apply(self._gamma, self.visit(expr))

	def _fresh(self, why) -> TypeVariable:
		v = self._env.fresh_variable()
		self._report.debug("fresh", v, "for", why)
		return v

	def _unify(self, x:Term, y:Term, stem:ValueExpression):
		unify_pair(x, y, self._gamma, stem, self._report)

	@contextmanager
	def _monomorphic(self, name:str, v:TypeVariable):
		""" Bind a name to a variable which must not be generalized within the scope. """
		with self._env.bind(name, v):
			inserted = v not in self._non_generic
			self._non_generic.add(v)
			try:
				yield v
			finally:
				if inserted:
					self._non_generic.discard(v)

	def visit_Literal(self, expr:syntax.Literal):
		if isinstance(expr.value, bool):
			return BOOL
		if isinstance(expr.value, int):
			return INT
		raise TypeError(expr.value)

	def visit_Identifier(self, expr:syntax.Identifier):
		if expr.name not in self._env:
			raise UndefinedSymbol(expr.name, expr)
		typ = instantiate(self._env[expr.name], self._env, self._non_generic, self._gamma)
		self._report.debug("instance of", expr.name, ":", typ)
		return typ

	def visit_Apply(self, expr:syntax.Apply):
		fn_type = self.visit(expr.fn)
		arg_type = self.visit(expr.arg)
		res = self._fresh(expr)
		self._unify(function(arg_type, res), fn_type, expr)
		return definitive(self._gamma, res)

	def visit_Lambda(self, expr:syntax.Lambda):
		with self._monomorphic(expr.param, self._fresh(expr.param)) as arg_type:
			body_type = self.visit(expr.body)
			res = self._fresh(expr)
			self._unify(res, function(arg_type, body_type), expr)
		return definitive(self._gamma, res)

	def visit_Let(self, expr:syntax.Let):
		defn_type = self.visit(expr.definition)
		with self._env.bind(expr.name, defn_type):
			return self.visit(expr.body)

	def visit_LetRec(self, expr:syntax.LetRec):
		with self._monomorphic(expr.name, self._fresh(expr.name)) as new_type:
			defn_type = self.visit(expr.definition)
			self._unify(new_type, defn_type, expr)
			return self.visit(expr.body)
