import unittest

from minipol import policy
from minipol.diagnostics import AssignedVariableExists
from minipol.evaluator import NativeFunction
from minipol.primitive import root_scope, NATIVES
from minipol.scope import Scope

class ScopeTests(unittest.TestCase):

	def test_lookup_chases_parents(self):
		root = Scope()
		root.set("a", policy.Value("A"))
		inner = root.derive().child()
		self.assertEqual(policy.Value("A"), inner.get("a"))
		self.assertIsNone(inner.get("b"))
		self.assertIn("a", inner)
		self.assertNotIn("b", inner)

	def test_shadowing_leaves_parent_alone(self):
		root = Scope()
		root.set("a", policy.Value("outer"))
		for make in (root.derive, root.child):
			with self.subTest(make.__name__):
				inner = make()
				inner.set("a", policy.Value("inner"))
				self.assertEqual(policy.Value("inner"), inner.get("a"))
				self.assertEqual(policy.Value("outer"), root.get("a"))

	def test_binding_stays_in_its_frame(self):
		root = Scope()
		inner = root.derive()
		inner.set("x", policy.Value("X"))
		self.assertTrue(inner.holds("x"))
		self.assertFalse(root.holds("x"))
		self.assertNotIn("x", root)

	def test_no_rebinding_in_same_frame(self):
		scope = Scope()
		scope.set("x", policy.Value("X"))
		with self.assertRaises(AssignedVariableExists):
			scope.set("x", policy.Value("Y"))
		self.assertEqual(policy.Value("X"), scope.get("x"))

	def test_holds_ignores_parents(self):
		root = Scope()
		root.set("x", policy.Value("X"))
		self.assertFalse(root.child().holds("x"))


class RootScopeTests(unittest.TestCase):

	def test_natives(self):
		scope = root_scope()
		for name in NATIVES:
			with self.subTest(name):
				self.assertEqual(NativeFunction(name), scope.get(name))
		self.assertIn("or", NATIVES)
		self.assertIn("and", NATIVES)

	def test_custom_natives(self):
		scope = root_scope(natives=("or", "and", "multi"))
		self.assertEqual(NativeFunction("multi"), scope.get("multi"))
		self.assertIsNone(scope.get("pk"))

	def test_each_root_is_independent(self):
		first, second = root_scope(), root_scope()
		first.set("x", policy.Value("X"))
		self.assertIsNone(second.get("x"))


if __name__ == '__main__':
	unittest.main()
