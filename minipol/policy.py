"""
The tree-shaped policy which evaluation ultimately produces.

This is the hand-off point: whatever later turns a policy into script
only needs function-call nodes and literal leaves, and that's all there is.
Nodes are immutable and compare by structure.
"""
from typing import Sequence

class Policy:
	__slots__ = ()
	def _key(self) -> tuple: raise NotImplementedError(type(self))
	def __eq__(self, other):
		return type(self) is type(other) and self._key() == other._key()
	def __hash__(self): return hash((type(self), self._key()))

class FnCall(Policy):
	__slots__ = ("name", "args")
	name: str
	args: tuple[Policy, ...]
	def __init__(self, name:str, args:Sequence[Policy]):
		assert all(isinstance(a, Policy) for a in args), args
		object.__setattr__(self, "name", name)
		object.__setattr__(self, "args", tuple(args))
	def __setattr__(self, key, value): raise AttributeError(key)
	def _key(self): return self.name, self.args
	def __repr__(self): return "FnCall(%r, %r)"%(self.name, list(self.args))
	def __str__(self): return "%s(%s)"%(self.name, ",".join(map(str, self.args)))

class Value(Policy):
	__slots__ = ("name",)
	name: str
	def __init__(self, name:str):
		object.__setattr__(self, "name", name)
	def __setattr__(self, key, value): raise AttributeError(key)
	def _key(self): return (self.name,)
	def __repr__(self): return "Value(%r)"%self.name
	def __str__(self): return self.name
