"""
The type environment: what each name in scope is known to be.

Binding constructs temporarily rebind names. Every such rebinding is undone
on the way out of its scope, whether by return or by exception, so one failed
inference never leaves junk behind for the next.
"""
from contextlib import contextmanager
from typing import Dict, Iterator, Mapping
from .algebra import Term, TypeVariable

_ABSENT = object()

class TypeEnvironment:
	"""
	Also the owner of the counter behind every type variable,
	since variable identity is nothing more than a number.
	"""

	def __init__(self, bindings: Mapping[str, Term] = ()):
		self._bindings: Dict[str, Term] = dict(bindings)
		self._next_id = 0

	def unique_id(self) -> int:
		nr = self._next_id
		self._next_id += 1
		return nr

	def fresh_variable(self) -> TypeVariable:
		return TypeVariable(self.unique_id())

	def __contains__(self, name: str) -> bool: return name in self._bindings
	def __getitem__(self, name: str) -> Term: return self._bindings[name]
	def __setitem__(self, name: str, typ: Term): self._bindings[name] = typ
	def __iter__(self) -> Iterator[str]: return iter(self._bindings)
	def __len__(self): return len(self._bindings)

	@contextmanager
	def bind(self, name: str, typ: Term):
		""" Rebind a name for the duration of a `with` block. """
		prior = self._bindings.get(name, _ABSENT)
		self._bindings[name] = typ
		try:
			yield typ
		finally:
			if prior is _ABSENT:
				del self._bindings[name]
			else:
				self._bindings[name] = prior
