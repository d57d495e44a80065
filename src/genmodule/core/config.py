"""Configuration dataclasses for a single generation run."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

LONG_DATE_FORMAT = "%Y-%m-%d"
YEAR_FORMAT = "%Y"


@dataclass(frozen=True, kw_only=True)
class ModuleConfig:
    """
    Names supplied on invocation.

    Values are taken verbatim: empty strings or characters that are unsafe in
    file names are not rejected.

    Attributes:
        module_name: Prefix of every generated type and file name, e.g. ``Home``.
        app_name: Application name written into the file headers.
        author: Author written into the "Created by" and copyright lines.
    """

    module_name: str
    app_name: str
    author: str


@dataclass(frozen=True, kw_only=True)
class DateConfig:
    """
    Date strings embedded in the file headers.

    Attributes:
        long_date: Creation date, ``YYYY-MM-DD``.
        year: Copyright year, ``YYYY``.
    """

    long_date: str
    year: str

    @classmethod
    def from_date(cls, when: date) -> DateConfig:
        return cls(
            long_date=when.strftime(LONG_DATE_FORMAT),
            year=when.strftime(YEAR_FORMAT),
        )


@dataclass(frozen=True, kw_only=True)
class RenderContext:
    """Everything a template needs. Built once per run."""

    module: ModuleConfig
    dates: DateConfig

    @classmethod
    def create(
        cls,
        module_name: str,
        app_name: str,
        author: str,
        *,
        when: date,
    ) -> RenderContext:
        return cls(
            module=ModuleConfig(module_name=module_name, app_name=app_name, author=author),
            dates=DateConfig.from_date(when),
        )
