"""
Tests for the internal helpers (Unset sentinel, coalesce, freeze).
"""
import copy
import pickle
import unittest
from types import MappingProxyType
from unittest import TestCase

from argbundle.utils import *


class UnsetTest(TestCase):
    """
    Test suite for the `Unset` singleton.
    """

    def testSingleton(self) -> None:
        self.assertIs(Unset, UnsetType())

    def testFalsely(self) -> None:
        self.assertFalse(bool(Unset))

    def testRepr(self) -> None:
        self.assertEqual(repr(Unset), "Unset")

    def testUnion(self) -> None:
        self.assertIsInstance("foo", str | Unset)
        self.assertIsInstance(Unset, str | Unset)

    def testCopyDeepcopyPickleKeepIdentity(self) -> None:
        self.assertIs(copy.copy(Unset), Unset)
        self.assertIs(copy.deepcopy(Unset), Unset)
        self.assertIs(pickle.loads(pickle.dumps(Unset)), Unset)

    def testFinalClass(self) -> None:
        with self.assertRaises(TypeError):
            type("UnsetType", (UnsetType,), {})


class CoalesceTest(TestCase):

    def testUnsetReplaced(self) -> None:
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")
        self.assertIsNone(coalesce(Unset))

    def testFalseyValuesPreserved(self) -> None:
        self.assertIsNone(coalesce(None, "fallback"))
        self.assertEqual(coalesce((), "fallback"), ())


class FreezeTest(TestCase):

    def testSequence(self) -> None:
        self.assertEqual(freeze(["foo"]), ("foo",))

    def testString(self) -> None:
        self.assertEqual(freeze("foo"), "foo")

    def testMapping(self) -> None:
        source = {"foo": "bar"}
        frozen = freeze(source)
        self.assertIsInstance(frozen, MappingProxyType)
        source["baz"] = "qux"
        self.assertEqual(frozen, {"foo": "bar"})

    def testOtherTypesPassThrough(self) -> None:
        source = {"foo"}
        self.assertIs(freeze(source), source)


class SurfaceTest(TestCase):

    def testExports(self) -> None:
        import argbundle.utils
        self.assertEqual(
            sorted(argbundle.utils.__all__),
            ["Unset", "UnsetType", "coalesce", "freeze"]
        )


if __name__ == '__main__':
    unittest.main()
