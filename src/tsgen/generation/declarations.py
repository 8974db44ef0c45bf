from __future__ import annotations

import structlog

from ..domain import (
    Enum,
    ImplementsReference,
    Interface,
    NumberAlias,
    Property,
    Reference,
    RequestInterface,
    StringAlias,
    TypeDefinition,
    UnionAlias,
)
from ..errors import UnknownDefinitionError
from .helpers import clean_property_name, stability_comment
from .profile import GenerationProfile
from .type_emitter import TypeEmitter

logger = structlog.get_logger(__name__)

_BOOLEAN_LITERALS = ("true", "false")


def emit_definition(definition: TypeDefinition, profile: GenerationProfile) -> str:
    """Render one type definition as a TypeScript declaration.

    Raises:
        UnknownDefinitionError: If the definition matches no known variant
    """
    emitter = TypeEmitter(profile)
    if isinstance(definition, StringAlias):
        return emit_string_alias(definition)
    if isinstance(definition, NumberAlias):
        return emit_number_alias(definition)
    if isinstance(definition, UnionAlias):
        return emit_union_alias(definition, emitter)
    if isinstance(definition, RequestInterface):
        return emit_request_interface(definition, emitter, profile)
    if isinstance(definition, Interface):
        return emit_interface(definition, emitter, profile)
    if isinstance(definition, Enum):
        return emit_enum(definition, profile)
    raise UnknownDefinitionError(f"Unsupported type definition: {type(definition).__name__}")


def emit_string_alias(definition: StringAlias) -> str:
    return f"  export type {definition.name} = string"


def emit_number_alias(definition: NumberAlias) -> str:
    return f"  export type {definition.name} = number"


def emit_union_alias(definition: UnionAlias, emitter: TypeEmitter) -> str:
    return f"  export type {definition.name} = {emitter.emit(definition.wraps)}"


def emit_enum(definition: Enum, profile: GenerationProfile) -> str:
    if profile.enum_as_union:
        literals = [_enum_literal(member.string_representation) for member in definition.members]
        return f"  export type {definition.name} = {' | '.join(literals)}"
    lines = [f"  export enum {definition.name} {{"]
    for member in definition.members:
        lines.append(f'    {clean_property_name(member.name)} = "{member.string_representation}",')
    lines.append("  }")
    return "\n".join(lines)


def emit_interface(
    definition: Interface,
    emitter: TypeEmitter,
    profile: GenerationProfile,
) -> str:
    lines = [_interface_header(definition, emitter)]
    lines.extend(_property_lines(definition.properties, emitter, indent="    "))
    lines.append("  }")
    return stability_comment(definition.name, profile.stable_names) + "\n".join(lines)


def emit_request_interface(
    definition: RequestInterface,
    emitter: TypeEmitter,
    profile: GenerationProfile,
) -> str:
    """Render a request as one interface.

    Members come from the path parameters, then the query parameters, then
    the body. An inline body becomes a nested optional ``body`` object.
    """
    lines = [_interface_header(definition, emitter)]
    if definition.path is not None:
        lines.extend(_property_lines(definition.path, emitter, indent="    "))
    if definition.query_parameters is not None:
        lines.extend(_property_lines(definition.query_parameters, emitter, indent="    "))
    if isinstance(definition.body, list):
        lines.append("    body?: {")
        lines.extend(_property_lines(definition.body, emitter, indent="      "))
        lines.append("    }")
    elif definition.body is not None:
        lines.append(f"    body?: {emitter.emit(definition.body)}")
    lines.append("  }")
    return stability_comment(definition.name, profile.stable_names) + "\n".join(lines)


def _interface_header(definition: Interface | RequestInterface, emitter: TypeEmitter) -> str:
    generics = f"<{', '.join(definition.open_generics)}>" if definition.open_generics else ""
    return f"  export interface {definition.name}{generics}{_inherits_clause(definition, emitter)} {{"


def _inherits_clause(definition: Interface | RequestInterface, emitter: TypeEmitter) -> str:
    inherits = definition.inherits
    if not inherits:
        return ""
    if len(inherits) == 1 and _referenced_name(inherits[0]) == emitter.profile.response_base:
        return ""
    return " extends " + ", ".join(emitter.emit(item) for item in inherits)


def _referenced_name(expr: object) -> str | None:
    if isinstance(expr, ImplementsReference):
        return expr.type_name
    if isinstance(expr, Reference):
        return expr.name
    return None


def _property_lines(
    properties: list[Property],
    emitter: TypeEmitter,
    indent: str,
) -> list[str]:
    lines: list[str] = []
    for prop in properties:
        if prop.type is None:
            logger.warning("Skipping property without a type", property=prop.name)
            continue
        optional = "?" if prop.nullable else ""
        lines.append(f"{indent}{clean_property_name(prop.name)}{optional}: {emitter.emit(prop.type)}")
    return lines


def _enum_literal(value: str) -> str:
    if value in _BOOLEAN_LITERALS:
        return value
    return f'"{value}"'
