"""Type expression rendering.

This module provides the TypeEmitter class which converts catalog type
expressions into TypeScript type strings.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..domain import (
    ArrayOf,
    Dictionary,
    ImplementsReference,
    Reference,
    SingleKeyDictionary,
    TypeExpression,
    UnionOf,
)
from ..errors import UnknownTypeError
from .profile import GenerationProfile


@dataclass
class TypeEmitter:
    """Converts type expressions to TypeScript type strings.

    Rendering is pure: the same expression always yields the same string,
    and names that do not exist in the catalog are passed through as-is.

    Attributes:
        profile: Generation profile of the current run; supplies the name of
            the dictionary response base rendered as a plain Record

    Example:
        >>> emitter = TypeEmitter(GenerationProfile())
        >>> emitter.emit(ArrayOf(Reference("Id")))
        'Id[]'
        >>> emitter.emit(Dictionary(Reference("string"), Reference("long")))
        'Record<string, long>'
        >>> emitter.emit(UnionOf([Reference("string"), Reference("long")]))
        'string | long'
    """

    profile: GenerationProfile

    def emit(self, expr: TypeExpression) -> str:
        """Convert a type expression to a TypeScript type string.

        Args:
            expr: The type expression to render

        Returns:
            The rendered type

        Raises:
            UnknownTypeError: If the expression matches no known variant
        """
        if isinstance(expr, ArrayOf):
            return f"{self.emit(expr.of)}[]"
        if isinstance(expr, Dictionary):
            return f"Record<{self.emit(expr.key)}, {self.emit(expr.value)}>"
        if isinstance(expr, SingleKeyDictionary):
            return f"Record<string, {self.emit(expr.value)}>"
        if isinstance(expr, UnionOf):
            return " | ".join(self.emit(item) for item in expr.items)
        if isinstance(expr, ImplementsReference):
            return self._emit_implements(expr)
        if isinstance(expr, Reference):
            if expr.closed_generics:
                return f"{expr.name}<{self._emit_generics(expr.closed_generics)}>"
            return expr.name
        raise UnknownTypeError(f"Unsupported type expression: {type(expr).__name__}")

    def _emit_implements(self, expr: ImplementsReference) -> str:
        """Render a reference with bound generics.

        Note:
            A single closed generic renders as the bare name. Only two or more
            closed generics produce a parameterized reference.
        """
        if expr.type_name == self.profile.dictionary_response_base:
            return f"Record<{self._emit_generics(expr.closed_generics)}>"
        if len(expr.closed_generics) > 1:
            return f"{expr.type_name}<{self._emit_generics(expr.closed_generics)}>"
        return expr.type_name

    def _emit_generics(self, generics: list[TypeExpression]) -> str:
        return ", ".join(self.emit(item) for item in generics)
