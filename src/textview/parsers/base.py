#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textview/parsers/base.py
"""Base class for source parsers.

A parser lowers a source document into the block tree. Implementations
produce a :class:`~textview.model.nodes.Root`; callers usually pass it
through :func:`~textview.model.transforms.compact` afterwards.

"""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from textview.exceptions import InvalidOptionsError, ValidationError
from textview.model.nodes import Root
from textview.options.base import BaseParserOptions

SourceInput = Union[str, bytes, Path, IO[str], IO[bytes]]


class BaseParser(ABC):
    """Abstract base class for all source parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: SourceInput) -> Root:
        """Lower the input document into a block tree.

        Parameters
        ----------
        input_data : str, bytes, Path or file-like
            A ``str`` is always treated as source text, not as a path.

        Returns
        -------
        Root
            Uncompacted block tree

        Raises
        ------
        ParsingError
            If the underlying library fails on the input
        DependencyError
            If the underlying library is not installed

        """
        raise NotImplementedError

    @staticmethod
    def _load_text_content(input_data: SourceInput) -> str:
        """Load source text from the supported input types.

        Raises
        ------
        ValidationError
            If the input type is not supported or bytes are not valid UTF-8

        """
        if isinstance(input_data, str):
            return input_data
        if isinstance(input_data, Path):
            input_data = input_data.read_bytes()
        elif isinstance(input_data, io.IOBase) or hasattr(input_data, "read"):
            input_data = input_data.read()
            if isinstance(input_data, str):
                return input_data

        if isinstance(input_data, bytes):
            try:
                return input_data.decode("utf-8-sig")
            except UnicodeDecodeError as e:
                raise ValidationError(
                    "Source bytes are not valid UTF-8", parameter_name="input_data", original_error=e
                ) from e

        raise ValidationError(
            f"Unsupported input type: {type(input_data).__name__}",
            parameter_name="input_data",
            parameter_value=type(input_data),
        )
