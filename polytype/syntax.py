"""
The expression tree, in simple form.

There is no parser: programs get built by calling these constructors directly.
The `call` helper saves some nesting when applying a curried function.
"""
from typing import Dict
from boozetools.support.foundation import Visitor
from .ontology import ValueExpression

class Literal(ValueExpression):
	def __init__(self, value):
		self.value = value
	def __repr__(self): return "<lit:%r>" % self.value

class Identifier(ValueExpression):
	def __init__(self, name:str):
		assert isinstance(name, str), type(name)
		self.name = name
	def __repr__(self): return "<ref:%s>" % self.name

class Apply(ValueExpression):
	def __init__(self, fn:ValueExpression, arg:ValueExpression):
		self.fn, self.arg = fn, arg

class Lambda(ValueExpression):
	def __init__(self, param:str, body:ValueExpression):
		self.param, self.body = param, body

class Let(ValueExpression):
	def __init__(self, name:str, definition:ValueExpression, body:ValueExpression):
		self.name, self.definition, self.body = name, definition, body

class LetRec(Let):
	""" Like Let, but the name is in scope within its own definition. """


def call(fn:ValueExpression, *args:ValueExpression) -> ValueExpression:
	for a in args:
		fn = Apply(fn, a)
	return fn

#########################

class Transcript(Visitor):
	"""
	Render an expression as text, noting where each sub-expression lands.
	The diagnostics use the spans to point at the trouble.
	"""

	def __init__(self, expr:ValueExpression):
		self._pieces = []
		self._width = 0
		self.spans: Dict[ValueExpression, slice] = {}
		self.visit(expr)
		self.text = "".join(self._pieces)

	def visit(self, expr:ValueExpression):
		start = self._width
		super().visit(expr)
		self.spans[expr] = slice(start, self._width)

	def _emit(self, text:str):
		self._pieces.append(text)
		self._width += len(text)

	def visit_Literal(self, expr:Literal):
		self._emit(str(expr.value).lower() if isinstance(expr.value, bool) else str(expr.value))

	def visit_Identifier(self, expr:Identifier):
		self._emit(expr.name)

	def visit_Apply(self, expr:Apply):
		self._emit("(")
		self.visit(expr.fn)
		self._emit(" ")
		self.visit(expr.arg)
		self._emit(")")

	def visit_Lambda(self, expr:Lambda):
		self._emit("(fn %s => " % expr.param)
		self.visit(expr.body)
		self._emit(")")

	def _binding(self, keyword, expr:Let):
		self._emit("(%s %s = " % (keyword, expr.name))
		self.visit(expr.definition)
		self._emit(" in ")
		self.visit(expr.body)
		self._emit(")")

	def visit_Let(self, expr:Let): self._binding("let", expr)
	def visit_LetRec(self, expr:LetRec): self._binding("letrec", expr)
