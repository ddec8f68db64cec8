"""
The overall control for turning a program into a policy.
Hosts drive the core through here, or through evaluate/run directly.
"""
from typing import Optional
from . import syntax, policy
from .diagnostics import Report, EvaluationError
from .evaluator import evaluate, as_policy, ENV
from .primitive import root_scope

def compile_policy(expr:syntax.Expr, scope:Optional[ENV]=None) -> policy.Policy:
	"""
	Evaluate a whole program and insist that the result be a policy.
	Without a scope, a fresh root scope of the usual natives is used.
	"""
	if scope is None:
		scope = root_scope()
	return as_policy(evaluate(expr, scope))

def run_program(expr:syntax.Expr, report:Report, scope:Optional[ENV]=None) -> Optional[policy.Policy]:
	report.info("Compiling", expr)
	try:
		result = compile_policy(expr, scope)
	except EvaluationError as ex:
		report.issue(ex)
		report.info("Compilation failed:", ex.describe())
		return None
	report.info("Compiled to", result)
	return result
