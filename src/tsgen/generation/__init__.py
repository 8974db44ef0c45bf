from .declarations import emit_definition
from .profile import GenerationProfile
from .type_emitter import TypeEmitter

__all__ = [
    "GenerationProfile",
    "TypeEmitter",
    "emit_definition",
]
