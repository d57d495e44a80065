"""Renders the module templates into file contents."""

from __future__ import annotations

import importlib.resources as ilr
import re

from genmodule.cli._types import Artifact
from genmodule.core.config import RenderContext

_HEADER_TEMPLATE = "header.swift"

FILE_NAME = "__FILE_NAME__"
MODULE_NAME = "__MODULE_NAME__"
APP_NAME = "__APP_NAME__"
AUTHOR = "__AUTHOR__"
LONG_DATE = "__LONG_DATE__"
YEAR = "__YEAR__"

_PLACEHOLDER_RE = re.compile(
    "|".join(re.escape(p) for p in (FILE_NAME, MODULE_NAME, APP_NAME, AUTHOR, LONG_DATE, YEAR))
)


def _read(filename: str) -> str:
    return (
        ilr.files("genmodule.cli")
        .joinpath("scaffold")
        .joinpath(filename)
        .read_text(encoding="utf-8")
    )


def _substitute(content: str, values: dict[str, str]) -> str:
    # Single pass: substituted values are never scanned for placeholders again.
    return _PLACEHOLDER_RE.sub(lambda m: values[m.group(0)], content)


def render_artifact(artifact: Artifact, context: RenderContext) -> str:
    """Render one artifact. Swift sources are prefixed with the shared file header."""
    module = context.module
    values = {
        FILE_NAME: artifact.filename(module.module_name),
        MODULE_NAME: module.module_name,
        APP_NAME: module.app_name,
        AUTHOR: module.author,
        LONG_DATE: context.dates.long_date,
        YEAR: context.dates.year,
    }

    content = _read(artifact.template)
    if artifact.has_header:
        content = _read(_HEADER_TEMPLATE) + content

    return _substitute(content, values)


def render_module(context: RenderContext) -> dict[str, str]:
    """Render every artifact. Returns file name -> content, in write order."""
    return {
        artifact.filename(context.module.module_name): render_artifact(artifact, context)
        for artifact in Artifact
    }
