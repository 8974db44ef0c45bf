"""Domain model of an API specification catalog.

The catalog is an ordered list of named type definitions describing the
request and response shapes of a REST API. Definitions refer to each other
through type expressions, which compose recursively.

Type definitions:
- StringAlias / NumberAlias: named aliases of a primitive
- UnionAlias: named alias of an arbitrary type expression
- Enum: closed set of string-valued members
- Interface: object shape, optionally generic and inheriting
- RequestInterface: API operation parameters split into path, query and body

Type expressions:
- ArrayOf, Dictionary, SingleKeyDictionary, UnionOf
- ImplementsReference: reference with bound generics, as used in inheritance
- Reference: plain reference to a named type
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Reference:
    """A direct reference to a named type.

    Attributes:
        name: The referenced type name
        closed_generics: Concrete type arguments bound at the point of use
    """

    name: str
    closed_generics: list[TypeExpression] = field(default_factory=list)


@dataclass(frozen=True)
class ImplementsReference:
    """A reference to another type definition with bound generic parameters.

    Attributes:
        type_name: The name of the referenced type definition
        closed_generics: Concrete type arguments bound to its open generics
    """

    type_name: str
    closed_generics: list[TypeExpression] = field(default_factory=list)


@dataclass(frozen=True)
class ArrayOf:
    of: TypeExpression


@dataclass(frozen=True)
class Dictionary:
    key: TypeExpression
    value: TypeExpression


@dataclass(frozen=True)
class SingleKeyDictionary:
    value: TypeExpression


@dataclass(frozen=True)
class UnionOf:
    items: list[TypeExpression]


TypeExpression = Union[ArrayOf, Dictionary, SingleKeyDictionary, UnionOf, ImplementsReference, Reference]


@dataclass(frozen=True)
class Property:
    """A member of an interface or request group.

    Attributes:
        name: The member name as it appears on the wire
        type: The member type, or None when the loader left it unresolved
        nullable: Whether the member may be omitted
    """

    name: str
    type: TypeExpression | None
    nullable: bool = False


@dataclass(frozen=True)
class StringAlias:
    name: str


@dataclass(frozen=True)
class NumberAlias:
    name: str


@dataclass(frozen=True)
class UnionAlias:
    name: str
    wraps: TypeExpression


@dataclass(frozen=True)
class EnumMember:
    name: str
    string_representation: str


@dataclass(frozen=True)
class Enum:
    name: str
    members: list[EnumMember]


@dataclass(frozen=True)
class Interface:
    """An object shape.

    Attributes:
        name: The declared type name
        open_generics: Generic parameter names declared by this interface
        inherits: Ancestor types, in declaration order
        properties: Members of the shape
    """

    name: str
    open_generics: list[str] = field(default_factory=list)
    inherits: list[TypeExpression] = field(default_factory=list)
    properties: list[Property] = field(default_factory=list)


@dataclass(frozen=True)
class RequestInterface:
    """Parameters of one API operation, flattened into a single shape.

    Attributes:
        name: The declared type name
        open_generics: Generic parameter names declared by this request
        inherits: Ancestor types, in declaration order
        path: URL path parameters, if the operation has any
        query_parameters: Query string parameters, if the operation has any
        body: Inline body members, a single body type, or None without a body
    """

    name: str
    open_generics: list[str] = field(default_factory=list)
    inherits: list[TypeExpression] = field(default_factory=list)
    path: list[Property] | None = None
    query_parameters: list[Property] | None = None
    body: list[Property] | TypeExpression | None = None


TypeDefinition = Union[StringAlias, NumberAlias, UnionAlias, Enum, Interface, RequestInterface]


@dataclass(frozen=True)
class Catalog:
    """Root container for all type definitions of one generation run.

    Attributes:
        types: Type definitions in output order
    """

    types: list[TypeDefinition]
