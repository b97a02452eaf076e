"""
The type terms: what unification and inference are all about.

A type is either a variable, standing for some yet-unknown type,
or else an operator of some kind applied to a fixed number of argument types.
Terms are immutable values. Substitution makes new terms; it never patches old ones.

Design Note:
-------------
The set of kinds is open. The four defined here suffice for the built-in
environment, but anything else with a name and an arity will unify just as well.
"""
from typing import NamedTuple, Sequence

class Kind(NamedTuple):
	name: str
	arity: int
	infix: str = ""  # Binary kinds may render between their arguments.

INTEGER = Kind("int", 0)
BOOLEAN = Kind("bool", 0)
FUNCTION = Kind("function", 2, "->")
PAIR = Kind("pair", 2, "*")

#########################

class Term:
	def visit(self, visitor:"TermVisitor"): raise NotImplementedError(type(self))
	def mentions(self, v:"TypeVariable") -> bool: raise NotImplementedError(type(self))
	def replace(self, v:"TypeVariable", replacement:"Term") -> "Term": raise NotImplementedError(type(self))
	def poll(self, seen:set): raise NotImplementedError(type(self))


class TypeVariable(Term):
	"""
	Identity is the number, and nothing else.
	Numbers come from the environment's counter, so there can be no capture.
	"""
	def __init__(self, nr:int):
		assert isinstance(nr, int), type(nr)
		self.nr = nr
	def __repr__(self): return "<%d>" % self.nr
	def __eq__(self, other): return type(other) is TypeVariable and other.nr == self.nr
	def __lt__(self, other:"TypeVariable"): return self.nr < other.nr
	def __hash__(self): return hash(self.nr)
	def visit(self, visitor:"TermVisitor"): return visitor.on_variable(self)
	def mentions(self, v:"TypeVariable") -> bool: return self == v
	def replace(self, v:"TypeVariable", replacement:Term) -> Term:
		return replacement if self == v else self
	def poll(self, seen:set): seen.add(self)


class TypeOperator(Term):
	def __init__(self, kind:Kind, args:Sequence[Term]=()):
		args = tuple(args)
		assert len(args) == kind.arity, (kind, args)
		self.kind, self.args = kind, args
	def __repr__(self):
		return self.kind.name + ("[%s]" % (', '.join(map(repr, self.args))) if self.args else "")
	def __eq__(self, other):
		return type(other) is TypeOperator and self.agrees_with(other) and self.args == other.args
	def __hash__(self): return hash((self.kind, self.args))
	def visit(self, visitor:"TermVisitor"): return visitor.on_operator(self)
	def agrees_with(self, other:"TypeOperator") -> bool:
		""" Same kind and same arity: the shapes could possibly be made equal. """
		return self.kind == other.kind and len(self.args) == len(other.args)
	def mentions(self, v:TypeVariable) -> bool:
		return any(a.mentions(v) for a in self.args)
	def replace(self, v:TypeVariable, replacement:Term) -> Term:
		if not self.mentions(v): return self
		return TypeOperator(self.kind, [a.replace(v, replacement) for a in self.args])
	def poll(self, seen:set):
		for a in self.args: a.poll(seen)

#########################

INT = TypeOperator(INTEGER)
BOOL = TypeOperator(BOOLEAN)

def function(arg:Term, res:Term) -> TypeOperator:
	return TypeOperator(FUNCTION, (arg, res))

def pair(first:Term, second:Term) -> TypeOperator:
	return TypeOperator(PAIR, (first, second))

def curried(*terms:Term) -> Term:
	""" curried(a, b, c) means a -> (b -> c). """
	*args, res = terms
	for arg in reversed(args):
		res = function(arg, res)
	return res

#########################

class TermVisitor:
	def on_variable(self, v:TypeVariable): raise NotImplementedError(type(self))
	def on_operator(self, op:TypeOperator): raise NotImplementedError(type(self))


class Render(TermVisitor):
	"""
	Return a string representation of the term.
	Variables get letters in the order first seen,
	so a Render shared among several terms names them consistently.
	"""
	def __init__(self):
		self._var_names = {}
	def __call__(self, term:Term) -> str:
		return term.visit(self)
	def on_variable(self, v: TypeVariable):
		if v not in self._var_names:
			self._var_names[v] = _name_variable(len(self._var_names) + 1)
		return self._var_names[v]
	def on_operator(self, op: TypeOperator):
		kind = op.kind
		if not op.args:
			return kind.name
		if kind.infix and len(op.args) == 2:
			lhs, rhs = op.args
			return "(%s %s %s)" % (lhs.visit(self), kind.infix, rhs.visit(self))
		return "%s[%s]" % (kind.name, ", ".join(a.visit(self) for a in op.args))

def render(term:Term) -> str:
	return Render()(term)

def _name_variable(n):
	name = ""
	while n:
		n, remainder = divmod(n-1, 26)
		name = chr(97+remainder) + name
	return name
