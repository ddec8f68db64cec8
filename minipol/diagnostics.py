"""
What can go wrong during evaluation, and how a host hears about it.

Evaluation is all-or-nothing: the first error aborts the whole thing,
so every failure is an exception. A Report is for the host that
drives the evaluator and wants to tell a human what happened.
"""
import sys
from typing import Any

class TooManyIssues(Exception):
	pass

class EvaluationError(Exception):
	trail: list[str]

	def __init__(self, *args):
		super().__init__(*args)
		self.trail = []

	def called_from(self, fn_name:str):
		""" Note a user-defined function this error escaped from, innermost first. """
		self.trail.append(fn_name)

	def describe(self) -> str:
		raise NotImplementedError(type(self))

class FnNotFound(EvaluationError):
	def __init__(self, name:str):
		super().__init__(name)
		self.name = name
	def describe(self):
		return "There is no function called '%s' in scope."%self.name

class NotFn(EvaluationError):
	def __init__(self, name:str):
		super().__init__(name)
		self.name = name
	def describe(self):
		return "'%s' was called, but it is a policy, not a function."%self.name

class ArgumentMismatch(EvaluationError):
	def __init__(self, name:str, expected:int, got:int):
		super().__init__(name, expected, got)
		self.name, self.expected, self.got = name, expected, got
	def describe(self):
		pattern = "Function '%s' takes %d argument(s) but got %d."
		return pattern%(self.name, self.expected, self.got)

class NotMiniscriptRepresentable(EvaluationError):
	def __init__(self, value:Any):
		super().__init__(value)
		self.value = value
	def describe(self):
		return "%s is a function; only policies may be used here."%(self.value,)

class AssignedVariableExists(EvaluationError):
	def __init__(self, name:str):
		super().__init__(name)
		self.name = name
	def describe(self):
		return "'%s' is already defined in this scope."%self.name


class Report:
	""" Collects issues on behalf of a host, and optionally chatters about progress. """
	_issues : list[EvaluationError]

	def __init__(self, *, verbose:int=0, max_issues=3):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues

	@property
	def issues(self): return tuple(self._issues)

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	def issue(self, it:EvaluationError):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)

	def reset(self):
		self._issues.clear()

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		for ex in self._issues:
			print(explain(ex), file=sys.stderr)

	def assert_no_issues(self, message="Evaluation failed."):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(message)

def explain(ex:EvaluationError) -> str:
	lines = [type(ex).__name__+": "+ex.describe()]
	lines.extend("  in function '%s'"%name for name in ex.trail)
	return "\n".join(lines)
