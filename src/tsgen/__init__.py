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
    UnionAlias,
    UnionOf,
)
from .errors import CatalogError, TsgenError, UnknownDefinitionError, UnknownTypeError
from .generation import GenerationProfile, TypeEmitter, emit_definition
from .generator import DeclarationsOutput, OutputSpec, generate_declarations, write_declarations
from .loader import load_catalog

__all__ = [
    "TsgenError",
    "CatalogError",
    "UnknownDefinitionError",
    "UnknownTypeError",
    "GenerationProfile",
    "TypeEmitter",
    "emit_definition",
    "DeclarationsOutput",
    "OutputSpec",
    "generate_declarations",
    "write_declarations",
    "load_catalog",
    "Catalog",
    "StringAlias",
    "NumberAlias",
    "UnionAlias",
    "Enum",
    "EnumMember",
    "Interface",
    "RequestInterface",
    "Property",
    "ArrayOf",
    "Dictionary",
    "SingleKeyDictionary",
    "UnionOf",
    "ImplementsReference",
    "Reference",
]
