"""
The set of parse-nodes in simple form.
A parser builds these bottom-up; the evaluator only ever reads them.
Names are plain strings. There is no separate name-space for functions.
"""
from typing import Sequence

class Expr:
	""" Something that reduces to a value and has no side-effects. """

class Stmt:
	""" Something that runs for its effect on a scope and yields nothing. """

class FnCall(Expr):
	def __init__(self, name:str, args:Sequence[Expr]):
		assert isinstance(name, str), name
		self.name = name
		self.args = tuple(args)
	def __repr__(self): return "<call %s%r>"%(self.name, self.args)

class _Combinator(Expr):
	""" Sugar for a call to the built-in of the same (lower-case) name """
	keyword: str
	def __init__(self, args:Sequence[Expr]):
		self.args = tuple(args)
	def as_call(self) -> FnCall: return FnCall(self.keyword, self.args)
	def __repr__(self): return "<%s%r>"%(self.keyword, self.args)

class Or(_Combinator): keyword = "or"
class And(_Combinator): keyword = "and"

class Block(Expr):
	def __init__(self, stmts:Sequence[Stmt], return_value:Expr):
		assert isinstance(return_value, Expr), return_value
		self.stmts = tuple(stmts)
		self.return_value = return_value
	def __repr__(self): return "<block %r; %r>"%(self.stmts, self.return_value)

class Value(Expr):
	"""
	A bare word. If it names something in scope, it is a reference to that.
	Otherwise it stands for itself, as a literal leaf of the policy.
	"""
	def __init__(self, name:str):
		assert isinstance(name, str), name
		self.name = name
	def __repr__(self): return "<word %s>"%self.name

class Assign(Stmt):
	def __init__(self, name:str, value:Expr):
		self.name = name
		self.value = value
	def __repr__(self): return "<%s = %r>"%(self.name, self.value)

class FnDef(Stmt):
	def __init__(self, name:str, params:Sequence[str], body:Expr):
		self.name = name
		self.params = tuple(params)
		self.body = body
	def arity(self): return len(self.params)
	def __repr__(self): return "<fn %s(%s)>"%(self.name, ", ".join(self.params))
