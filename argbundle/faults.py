"""
Argbundle faults (errors) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for all user-facing issues.
- BundleError: base type that carries message + options and knows how to render
  itself in a friendly, lowercased, and actionable way.
- InvalidKeyType: raised by indexed lookup when the key is neither an int nor a str.

Integration
- Faults are plain exceptions: they are raised synchronously and never retried.
- When printed through a rich console, faults render as a header, a message and a hint.
- The host application may customize rendering through __main__:
  • __prog__: program name in the header (defaults to "argbundle").
  • __codes__: {FaultCode: label} remapping of numeric codes.
  • __styles__: style overrides (see BundleError.__rich__).
"""
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Group
from rich.text import Text

from .utils import Unset, coalesce


class FaultCode(IntEnum):
    """
    canonical fault codes used across the package (stable identifiers).

    grouping (by high-level domain)
    - generic (13100)
      • BUNDLE_ERROR
    - lookup (1310x)
      • INVALID_KEY_TYPE
    """
    BUNDLE_ERROR                = 13100

    # --- lookup errors (131xx) ---
    INVALID_KEY_TYPE            = 13101

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class BundleError(Exception):
    """
    base category for every fault raised by argbundle.

    options
    - code: FaultCode (defaults to the class-level __code__).
    - title: short title shown in the rendered header.
    - hint: one-sentence actionable hint.
    - colorful: whether rich rendering uses styles (defaults to True).
    """
    __code__ = FaultCode.BUNDLE_ERROR
    __title__ = "bundle error"

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        self.message = coalesce(message, "")
        self.options = MappingProxyType({
            "code": type(self).__code__,
            "title": type(self).__title__,
            "hint": "",
            "colorful": True,
        } | options)
        super().__init__(self.message)

    @property
    def code(self):
        return self.options["code"]

    def __rich__(self):
        main = __import__("__main__")

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        } | getattr(main, "__styles__", {}))

        def styler(style):
            return styles[style] if self.options["colorful"] else ""

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not self.options["colorful"]:
                return Text(str(fragment))
            return Text(str(fragment), style)

        header = Text.assemble(
            "[ ",
            text(getattr(main, "__prog__", "argbundle"), styler("prog-name")),
            " — ",
            text(self.code.normalize(), styler("code")),
            " | ",
            text(self.options["title"].title(), styler("error-title")),
            " ]"
        )
        message = text(self.message, styler("error-message"))

        if not self.options["hint"]:
            return Group(header, message)

        hint = Text.assemble(text(" → ", styler("hint-arrow")), text(self.options["hint"], styler("hint")))
        return Group(header, message, hint)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class InvalidKeyType(BundleError):
    """
    raised when indexed lookup receives a key that is neither an int nor a str.

    the offending key is kept on `.key`; the message embeds its repr and type name.
    """
    __code__ = FaultCode.INVALID_KEY_TYPE
    __title__ = "invalid key type"

    def __init__(self, key, /, **options):
        self.key = key
        super().__init__(
            "`get()` and `[]` accept only `int` and `str` keys.\n"
            "\n"
            f"Key `{key!r}` has `{type(key).__name__}` class.",
            **{"hint": "use an index for positionals or a name for keyed arguments"} | options
        )

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.key, **{**self.options, **overrides})


__all__ = (
    "FaultCode",
    "BundleError",
    "InvalidKeyType",
)
