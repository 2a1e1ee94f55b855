#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textview/options/base.py
"""Base classes for parser and renderer options.

All options are frozen dataclasses. Field ``metadata`` carries a ``help``
string describing the option; :meth:`CloneFrozenMixin.create_updated`
returns a modified copy.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for all parser options.

    Parsers lower a source document (markdown, HTML) into the block tree.
    """


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Renderers walk the block tree and materialize each node.
    """
