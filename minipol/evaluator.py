"""
The tree-walking core: run-time values, expression evaluation, and statement execution.

Expressions have no side-effects and return a value.
Statements have side-effects on a scope and return nothing.

A run-time value is exactly one of:
	* a policy, which plays itself;
	* a user-defined function, which is only its definition (no captured environment);
	* a native function, which is only a name.
"""
from abc import ABC, abstractmethod
from typing import Sequence, Union
from boozetools.support.foundation import Visitor
from . import syntax, policy
from .diagnostics import EvaluationError, FnNotFound, NotFn, ArgumentMismatch, NotMiniscriptRepresentable
from .scope import Scope

VALUE = Union[policy.Policy, "Function"]
ARGS = Sequence[VALUE]
ENV = Scope[VALUE]


class Function(ABC):
	""" A run-time object that can be applied with arguments. """
	name: str

	@abstractmethod
	def apply(self, args: ARGS, scope: ENV) -> VALUE: pass

class UserFunction(Function):
	"""
	The run-time manifestation of a function definition.

	The body is evaluated in a frame made from the *caller's* scope,
	so free names resolve wherever the function is called from.
	A function finds itself by name the same way, hence recursion.
	"""
	def __init__(self, fn_def: syntax.FnDef):
		self.fn_def = fn_def
		self.name = fn_def.name

	def __repr__(self): return repr(self.fn_def)

	def apply(self, args: ARGS, scope: ENV) -> VALUE:
		if len(args) != self.fn_def.arity():
			raise ArgumentMismatch(self.name, self.fn_def.arity(), len(args))
		inner = scope.child()
		for param, value in zip(self.fn_def.params, args):
			inner.set(param, value)
		try:
			return evaluate(self.fn_def.body, inner)
		except EvaluationError as ex:
			ex.called_from(self.name)
			raise

class NativeFunction(Function):
	""" A built-in. Its whole behavior is to build a policy call-node of the same name. """
	def __init__(self, name: str):
		self.name = name

	def __repr__(self): return "<native %s>"%self.name

	def __eq__(self, other): return isinstance(other, NativeFunction) and other.name == self.name
	def __hash__(self): return hash(self.name)

	def apply(self, args: ARGS, scope: ENV) -> policy.Policy:
		return policy.FnCall(self.name, [as_policy(a) for a in args])


def as_policy(value: VALUE) -> policy.Policy:
	""" Narrow a run-time value to a policy. Functions never qualify. """
	if isinstance(value, policy.Policy):
		return value
	raise NotMiniscriptRepresentable(value)

###############################################################################

class Evaluator(Visitor):

	def visit_FnCall(self, expr: syntax.FnCall, scope: ENV) -> VALUE:
		function = scope.get(expr.name)
		if function is None:
			raise FnNotFound(expr.name)
		args = [self.visit(a, scope) for a in expr.args]
		if not isinstance(function, Function):
			raise NotFn(expr.name)
		return function.apply(args, scope)

	def visit_Or(self, expr: syntax.Or, scope: ENV) -> VALUE:
		return self.visit_FnCall(expr.as_call(), scope)

	def visit_And(self, expr: syntax.And, scope: ENV) -> VALUE:
		return self.visit_FnCall(expr.as_call(), scope)

	def visit_Value(self, expr: syntax.Value, scope: ENV) -> VALUE:
		binding = scope.get(expr.name)
		if binding is None:
			# Unbound words are literals, passed through for the policy to interpret.
			return policy.Value(expr.name)
		return binding

	def visit_Block(self, expr: syntax.Block, scope: ENV) -> VALUE:
		inner = scope.derive()
		for stmt in expr.stmts:
			run(stmt, inner)
		return self.visit(expr.return_value, inner)

class Executor(Visitor):

	def visit_Assign(self, stmt: syntax.Assign, scope: ENV):
		value = evaluate(stmt.value, scope)
		scope.set(stmt.name, value)

	def visit_FnDef(self, stmt: syntax.FnDef, scope: ENV):
		scope.set(stmt.name, UserFunction(stmt))

_evaluator = Evaluator()
_executor = Executor()

def evaluate(expr: syntax.Expr, scope: ENV) -> VALUE:
	assert isinstance(expr, syntax.Expr), expr
	return _evaluator.visit(expr, scope)

def run(stmt: syntax.Stmt, scope: ENV) -> None:
	assert isinstance(stmt, syntax.Stmt), stmt
	_executor.visit(stmt, scope)
