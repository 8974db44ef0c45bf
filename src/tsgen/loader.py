from __future__ import annotations

import json
import re
from collections.abc import Mapping
from os import PathLike
from pathlib import Path
from typing import cast

import yaml

from .domain import (
    ArrayOf,
    Catalog,
    Dictionary,
    Enum,
    EnumMember,
    ImplementsReference,
    Interface,
    NumberAlias,
    Property,
    Reference,
    RequestInterface,
    SingleKeyDictionary,
    StringAlias,
    TypeDefinition,
    TypeExpression,
    UnionAlias,
    UnionOf,
)
from .errors import CatalogError

CatalogSource = str | PathLike[str] | Mapping[str, object]

_BOOL_TAG = "tag:yaml.org,2002:bool"


class _CatalogYamlLoader(yaml.SafeLoader):
    """SafeLoader that reads only true/false as booleans, never on/off/yes/no."""


_CatalogYamlLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
_CatalogYamlLoader.add_implicit_resolver(
    _BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def load_catalog(source: CatalogSource) -> Catalog:
    """Load a catalog of type definitions from a file or a parsed mapping.

    Args:
        source: A path to a JSON/YAML file, or a mapping with a ``types`` list

    Returns:
        The catalog, with definitions in source order

    Raises:
        CatalogError: If the source does not describe a valid catalog
    """
    document = _read_source(source)
    types = document.get("types")
    if not isinstance(types, list):
        raise CatalogError("Missing or invalid 'types' field in catalog")
    return Catalog(types=[_build_definition(item, f"types[{index}]") for index, item in enumerate(types)])


def _read_source(source: CatalogSource) -> Mapping[str, object]:
    if isinstance(source, Mapping):
        return source
    path = Path(source)
    text = path.read_text(encoding="utf-8")
    if path.suffix in {".yaml", ".yml"}:
        data = _load_yaml(text)
    else:
        data = _load_json_or_yaml(text)
    if not isinstance(data, dict):
        raise CatalogError("Catalog document must be an object")
    return cast(Mapping[str, object], data)


def _load_json_or_yaml(text: str) -> object:
    """Try to load as JSON, fall back to YAML if that fails."""
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return _load_yaml(text)


def _load_yaml(text: str) -> object:
    try:
        return yaml.load(text, Loader=_CatalogYamlLoader)  # noqa: S506
    except yaml.YAMLError as exc:
        raise CatalogError("Catalog document is neither valid JSON nor YAML") from exc


def _build_definition(data: object, where: str) -> TypeDefinition:
    item = _expect_mapping(data, where)
    kind = item.get("kind")
    name = _expect_str(item.get("name"), f"{where}.name")
    if kind == "string_alias":
        return StringAlias(name=name)
    if kind == "number_alias":
        return NumberAlias(name=name)
    if kind == "union_alias":
        return UnionAlias(name=name, wraps=_build_expression(item.get("wraps"), f"{where}.wraps"))
    if kind == "enum":
        return Enum(name=name, members=_build_members(item.get("members", []), f"{where}.members"))
    if kind == "interface":
        return Interface(
            name=name,
            open_generics=_build_generics(item.get("openGenerics", []), f"{where}.openGenerics"),
            inherits=_build_expressions(item.get("inherits", []), f"{where}.inherits"),
            properties=_build_properties(item.get("properties", []), f"{where}.properties"),
        )
    if kind == "request":
        return RequestInterface(
            name=name,
            open_generics=_build_generics(item.get("openGenerics", []), f"{where}.openGenerics"),
            inherits=_build_expressions(item.get("inherits", []), f"{where}.inherits"),
            path=_build_optional_properties(item.get("path"), f"{where}.path"),
            query_parameters=_build_optional_properties(item.get("queryParameters"), f"{where}.queryParameters"),
            body=_build_body(item.get("body"), f"{where}.body"),
        )
    raise CatalogError(f"Unknown definition kind at {where}: {kind!r}")


def _build_expression(data: object, where: str) -> TypeExpression:
    if isinstance(data, str):
        return Reference(name=data)
    item = _expect_mapping(data, where)
    kind = item.get("kind")
    if kind == "array_of":
        return ArrayOf(of=_build_expression(item.get("of"), f"{where}.of"))
    if kind == "dictionary":
        return Dictionary(
            key=_build_expression(item.get("key"), f"{where}.key"),
            value=_build_expression(item.get("value"), f"{where}.value"),
        )
    if kind == "single_key_dictionary":
        return SingleKeyDictionary(value=_build_expression(item.get("value"), f"{where}.value"))
    if kind == "union_of":
        return UnionOf(items=_build_expressions(item.get("items"), f"{where}.items"))
    if kind == "implements":
        return ImplementsReference(
            type_name=_expect_str(item.get("type"), f"{where}.type"),
            closed_generics=_build_expressions(item.get("closedGenerics", []), f"{where}.closedGenerics"),
        )
    if kind == "reference":
        return Reference(
            name=_expect_str(item.get("name"), f"{where}.name"),
            closed_generics=_build_expressions(item.get("closedGenerics", []), f"{where}.closedGenerics"),
        )
    raise CatalogError(f"Unknown type expression kind at {where}: {kind!r}")


def _build_expressions(data: object, where: str) -> list[TypeExpression]:
    return [_build_expression(item, f"{where}[{index}]") for index, item in enumerate(_expect_list(data, where))]


def _build_properties(data: object, where: str) -> list[Property]:
    properties: list[Property] = []
    for index, raw in enumerate(_expect_list(data, where)):
        item = _expect_mapping(raw, f"{where}[{index}]")
        raw_type = item.get("type")
        properties.append(
            Property(
                name=_expect_str(item.get("name"), f"{where}[{index}].name"),
                type=None if raw_type is None else _build_expression(raw_type, f"{where}[{index}].type"),
                nullable=_expect_bool(item.get("nullable", False), f"{where}[{index}].nullable"),
            )
        )
    return properties


def _build_optional_properties(data: object, where: str) -> list[Property] | None:
    if data is None:
        return None
    return _build_properties(data, where)


def _build_body(data: object, where: str) -> list[Property] | TypeExpression | None:
    if data is None:
        return None
    if isinstance(data, list):
        return _build_properties(data, where)
    return _build_expression(data, where)


def _build_members(data: object, where: str) -> list[EnumMember]:
    members: list[EnumMember] = []
    for index, raw in enumerate(_expect_list(data, where)):
        item = _expect_mapping(raw, f"{where}[{index}]")
        name = _expect_str(item.get("name"), f"{where}[{index}].name")
        representation = _expect_scalar(item.get("stringRepresentation", name), f"{where}[{index}].stringRepresentation")
        members.append(EnumMember(name=name, string_representation=representation))
    return members


def _build_generics(data: object, where: str) -> list[str]:
    return [_expect_str(item, f"{where}[{index}]") for index, item in enumerate(_expect_list(data, where))]


def _expect_mapping(data: object, where: str) -> Mapping[str, object]:
    if not isinstance(data, Mapping):
        raise CatalogError(f"Expected an object at {where}")
    return cast(Mapping[str, object], data)


def _expect_list(data: object, where: str) -> list[object]:
    if not isinstance(data, list):
        raise CatalogError(f"Expected a list at {where}")
    return data


def _expect_str(data: object, where: str) -> str:
    if not isinstance(data, str) or not data:
        raise CatalogError(f"Expected a non-empty string at {where}")
    return data


def _expect_bool(data: object, where: str) -> bool:
    if not isinstance(data, bool):
        raise CatalogError(f"Expected a boolean at {where}")
    return data


def _expect_scalar(data: object, where: str) -> str:
    """Read an enum string representation; booleans and numbers keep their source spelling."""
    if isinstance(data, bool):
        return "true" if data else "false"
    if isinstance(data, (int, float)):
        return str(data)
    if not isinstance(data, str):
        raise CatalogError(f"Expected a string, number or boolean at {where}")
    return data
