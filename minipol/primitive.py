"""
Build the primitive namespace.

Natives have no definition body. Calling one just builds the policy
call-node of the same name, so all a root scope needs is the names.
"""
from typing import Iterable
from .evaluator import NativeFunction, ENV
from .scope import Scope

# "or" and "and" must always be here: the Or/And syntax relies on them.
NATIVES = (
	"or", "and", "thresh",
	"pk", "after", "older",
	"sha256", "hash256", "ripemd160", "hash160",
)

def root_scope(natives:Iterable[str]=NATIVES) -> ENV:
	""" A fresh root frame, shared with nobody. """
	scope = Scope()
	for name in natives:
		scope.set(name, NativeFunction(name))
	return scope
