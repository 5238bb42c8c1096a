"""
Faults module behavioral tests (hierarchy, codes, messages, rendering).

Conventions
- Test method names follow CamelCase per project convention.
- Rendering is checked through a colorless rich Console capture.
"""

import unittest
from unittest import TestCase, mock

from rich.console import Console

from argbundle import BundleError, FaultCode, InvalidKeyType


def render(fault) -> str:
    console = Console(color_system=None, force_terminal=False, width=120)
    with console.capture() as capture:
        console.print(fault)
    return capture.get()


class HierarchyTest(TestCase):
    """Exception taxonomy."""

    def testBundleErrorIsException(self):
        self.assertEqual(BundleError.__mro__[1], Exception)

    def testInvalidKeyTypeIsBundleError(self):
        self.assertEqual(InvalidKeyType.__mro__[1], BundleError)


class FaultCodeTest(TestCase):
    """FaultCode values and host normalization."""

    def testCodes(self):
        self.assertEqual(BundleError().code, FaultCode.BUNDLE_ERROR)
        self.assertEqual(InvalidKeyType(3.5).code, FaultCode.INVALID_KEY_TYPE)

    def testNormalizeDefaultsToNumericValue(self):
        self.assertEqual(FaultCode.INVALID_KEY_TYPE.normalize(), "13101")

    def testNormalizeUsesHostCodes(self):
        main = __import__("__main__")
        with mock.patch.object(main, "__codes__", {FaultCode.INVALID_KEY_TYPE: "E-KEY"}, create=True):
            self.assertEqual(FaultCode.INVALID_KEY_TYPE.normalize(), "E-KEY")


class InvalidKeyTypeTest(TestCase):
    """Message construction and options."""

    def testMessage(self):
        fault = InvalidKeyType(None)
        self.assertEqual(
            fault.message,
            "`get()` and `[]` accept only `int` and `str` keys.\n"
            "\n"
            "Key `None` has `NoneType` class."
        )
        self.assertEqual(str(fault), fault.message)
        self.assertIsNone(fault.key)

    def testOptionsAreReadOnly(self):
        with self.assertRaises(TypeError):
            InvalidKeyType(3.5).options["hint"] = ""  # type: ignore[index]

    def testReplaceKeepsKeyAndOverridesOptions(self):
        fault = InvalidKeyType(3.5).__replace__(colorful=False)
        self.assertIsInstance(fault, InvalidKeyType)
        self.assertEqual(fault.key, 3.5)
        self.assertFalse(fault.options["colorful"])


class RenderingTest(TestCase):
    """Rich rendering of faults."""

    def testRenderHeaderMessageAndHint(self):
        output = render(InvalidKeyType(3.5, colorful=False))
        self.assertIn("[ argbundle — 13101 | Invalid Key Type ]", output)
        self.assertIn("Key `3.5` has `float` class.", output)
        self.assertIn("→ use an index for positionals or a name for keyed arguments", output)

    def testRenderWithoutHint(self):
        output = render(BundleError("something went wrong", colorful=False))
        self.assertIn("[ argbundle — 13100 | Bundle Error ]", output)
        self.assertIn("something went wrong", output)
        self.assertNotIn("→", output)

    def testRenderUsesHostProgramName(self):
        main = __import__("__main__")
        with mock.patch.object(main, "__prog__", "memo", create=True):
            output = render(InvalidKeyType(3.5))
        self.assertIn("[ memo — 13101 | Invalid Key Type ]", output)


if __name__ == "__main__":
    unittest.main()
