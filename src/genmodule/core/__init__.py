"""Core data objects shared by the renderer and the CLI."""

from genmodule.core.config import DateConfig, ModuleConfig, RenderContext

__all__ = [
    "DateConfig",
    "ModuleConfig",
    "RenderContext",
]
