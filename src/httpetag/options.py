"""Caching option resolution.

Callers pass a partial configuration; :func:`resolve_options` fills in the
defaults. The default Cache-Control value depends on ``max_age``, so it is
built here rather than declared as a field default.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_MAX_AGE = 0
DEFAULT_WEAK = True
DEFAULT_CACHE_CONTROL_TEMPLATE = "private, no-cache, max-age={max_age}, must-revalidate"


class CachingOptionsInput(BaseModel):
    """Caller-supplied caching options.

    Leaving ``cache_control`` unset selects the default header built from
    ``max_age``. Setting it to None suppresses the Cache-Control header.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    cache_control: str | None = Field(default=None, alias="cacheControl")
    max_age: int = Field(default=DEFAULT_MAX_AGE, alias="maxAge")
    weak: bool = DEFAULT_WEAK


class CachingOptions(BaseModel):
    """Fully resolved caching options."""

    model_config = ConfigDict(frozen=True)

    cache_control: str | None
    max_age: int
    weak: bool


def resolve_options(
    options: CachingOptions | CachingOptionsInput | Mapping[str, Any] | None = None,
) -> CachingOptions:
    """Merge caller options with the defaults.

    Args:
        options: Partial options, as a model or a plain mapping. Already
            resolved options are returned as they are.

    Returns:
        Resolved options. An explicit ``cache_control`` (including None) is
        kept verbatim and ``max_age`` does not affect it.
    """
    if isinstance(options, CachingOptions):
        return options
    if options is None:
        options = CachingOptionsInput()
    elif not isinstance(options, CachingOptionsInput):
        options = CachingOptionsInput.model_validate(dict(options))

    if "cache_control" in options.model_fields_set:
        cache_control = options.cache_control
    else:
        cache_control = DEFAULT_CACHE_CONTROL_TEMPLATE.format(max_age=options.max_age)

    return CachingOptions(
        cache_control=cache_control,
        max_age=options.max_age,
        weak=options.weak,
    )
