from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import structlog

from .domain import Catalog
from .generation import GenerationProfile, emit_definition
from .log import bind_definition

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class OutputSpec:
    output_path: Path


@dataclass
class DeclarationsOutput:
    code: str
    emitted: int
    skipped: int


def generate_declarations(catalog: Catalog, profile: GenerationProfile) -> DeclarationsOutput:
    """Render every catalog definition inside one namespace declaration.

    Definitions are emitted in catalog order. Names listed in
    ``profile.skip_names`` never get a declaration of their own.
    """
    declarations: list[str] = []
    skipped = 0
    for definition in catalog.types:
        with bind_definition(definition.name):
            if definition.name in profile.skip_names:
                logger.debug("Skipping internal base type")
                skipped += 1
                continue
            declarations.append(emit_definition(definition, profile))

    lines = [
        f"declare namespace {profile.namespace} {{",
        "\n\n".join(declarations),
        "}",
        "",
        f"export default {profile.namespace}",
    ]
    return DeclarationsOutput(code="\n".join(lines), emitted=len(declarations), skipped=skipped)


def write_declarations(
    spec: OutputSpec,
    catalog: Catalog,
    profile: GenerationProfile,
) -> Path:
    output = generate_declarations(catalog, profile)
    spec.output_path.parent.mkdir(parents=True, exist_ok=True)
    spec.output_path.write_text(output.code, encoding="utf-8")
    logger.info(
        "Wrote declarations",
        path=str(spec.output_path),
        emitted=output.emitted,
        skipped=output.skipped,
    )
    return spec.output_path
