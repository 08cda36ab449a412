"""Render failures.

Everything deriving from ``RenderError`` aborts the whole render.
``ModuleLookupError`` is the soft miss the evaluator turns into placeholder text.
"""

from __future__ import annotations


class RenderError(RuntimeError):
    pass


class TemplateParseError(RenderError):
    def __init__(self, line: str, offset: int) -> None:
        self.line = line
        self.offset = offset
        super().__init__(f"PARSER: opened tag is not closed at index {offset} in string {line!r}")


class UnknownModuleError(RenderError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Invalid include module name {name!r}")


class LogoSourceError(RenderError):
    pass


class ModuleLookupError(KeyError):
    pass
