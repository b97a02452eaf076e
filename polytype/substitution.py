"""
A substitution says what each solved type variable stands for.
In practice it's a plain dict from TypeVariable to Term, called gamma here and there.

The unifier keeps it acyclic: no variable is ever reachable from its own binding.
That is why the chases below terminate.
"""
from typing import MutableMapping
from .algebra import Term, TermVisitor, TypeVariable, TypeOperator

Substitution = MutableMapping[TypeVariable, Term]

def definitive(gamma: Substitution, term: Term) -> Term:
	"""
	Follow the chain of bindings from a variable until reaching either
	an operator or a variable with no binding. Operators come back as-is.
	"""
	while isinstance(term, TypeVariable) and term in gamma:
		term = gamma[term]
	return term

class Rewrite(TermVisitor):
	""" Rebuild a term with every bound variable, however deep, replaced by its definitive form. """
	def __init__(self, gamma: Substitution):
		self.gamma = gamma
	def on_variable(self, v: TypeVariable):
		it = definitive(self.gamma, v)
		return it if isinstance(it, TypeVariable) else it.visit(self)
	def on_operator(self, op: TypeOperator):
		return op if not op.args else TypeOperator(op.kind, [a.visit(self) for a in op.args])

def apply(gamma: Substitution, term: Term) -> Term:
	return term.visit(Rewrite(gamma))
