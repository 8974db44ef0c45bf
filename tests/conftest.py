from __future__ import annotations

import logging
from collections.abc import Generator

import pytest
import structlog

from tsgen.domain import (
    ArrayOf,
    Catalog,
    Enum,
    EnumMember,
    ImplementsReference,
    Interface,
    Property,
    Reference,
    RequestInterface,
    StringAlias,
    UnionAlias,
    UnionOf,
)


@pytest.fixture()
def sample_catalog() -> Catalog:
    return Catalog(
        types=[
            StringAlias(name="Id"),
            Interface(name="ResponseBase"),
            UnionAlias(name="Ids", wraps=UnionOf([Reference("Id"), ArrayOf(Reference("Id"))])),
            Enum(
                name="Conflicts",
                members=[
                    EnumMember(name="abort", string_representation="abort"),
                    EnumMember(name="proceed", string_representation="proceed"),
                ],
            ),
            Interface(
                name="GetResponse",
                inherits=[ImplementsReference("ResponseBase")],
                properties=[Property(name="_id", type=Reference("Id"))],
            ),
            RequestInterface(
                name="GetRequest",
                path=[Property(name="id", type=Reference("Id"))],
            ),
        ]
    )


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None, None, None]:
    """Restore logging state changed by configure_logging after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    tsgen_logger = logging.getLogger("tsgen")
    tsgen_level = tsgen_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    tsgen_logger.setLevel(tsgen_level)
    structlog.reset_defaults()
