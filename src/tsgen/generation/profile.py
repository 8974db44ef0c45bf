from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

RESPONSE_BASE = "ResponseBase"
DICTIONARY_RESPONSE_BASE = "DictionaryResponseBase"

STABLE_NAMES = frozenset(
    {
        "IndexRequest",
        "IndexResponse",
        "CreateRequest",
        "CreateResponse",
        "DeleteRequest",
        "DeleteResponse",
        "UpdateRequest",
        "UpdateResponse",
        "GetRequest",
        "GetResponse",
    }
)

ENUM_AS_UNION_VAR = "ENUM_AS_UNION"


@dataclass(frozen=True)
class GenerationProfile:
    enum_as_union: bool = False
    namespace: str = "T"
    response_base: str = RESPONSE_BASE
    dictionary_response_base: str = DICTIONARY_RESPONSE_BASE
    stable_names: frozenset[str] = STABLE_NAMES

    @property
    def skip_names(self) -> frozenset[str]:
        """Internal base types that never get a declaration of their own."""
        return frozenset({self.response_base, self.dictionary_response_base})

    @classmethod
    def from_env(cls, environ: Mapping[str, str], namespace: str = "T") -> "GenerationProfile":
        return cls(
            enum_as_union=bool(environ.get(ENUM_AS_UNION_VAR)),
            namespace=namespace,
        )
