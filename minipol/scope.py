"""
Nested scopes for the evaluator.

Each frame owns its own bindings and links to the frame it was made from.
Lookup chases that link outward. Binding only ever touches the top frame,
so an inner binding shadows an outer one without disturbing it.
"""
from typing import Optional
from .diagnostics import AssignedVariableExists

class Scope[T]:
	_bindings: dict[str, T]
	_parent: Optional["Scope[T]"]

	def __init__(self, parent:Optional["Scope[T]"]=None):
		self._bindings = {}
		self._parent = parent

	def __contains__(self, key:str) -> bool:
		return self.get(key) is not None

	def get(self, key:str) -> Optional[T]:
		scope = self
		while scope is not None:
			try: return scope._bindings[key]
			except KeyError: scope = scope._parent
		return None

	def holds(self, key:str) -> bool:
		""" Is the key bound in this very frame? """
		return key in self._bindings

	def set(self, key:str, value:T):
		if self.holds(key):
			raise AssignedVariableExists(key)
		self._bindings[key] = value

	# Both kinds of nesting make the same sort of frame.
	# The distinction is for the reader of the evaluator.

	def derive(self) -> "Scope[T]":
		""" A new frame for a lexical block """
		return Scope(self)

	def child(self) -> "Scope[T]":
		""" A new frame for a function invocation """
		return Scope(self)
