"""Descriptions of script functions and their parameters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

NDARRAY_ANNOTATION = "<class 'numpy.ndarray'>"


@dataclass
class ParameterInfo:
    """One parameter of a script function.

    ``kind`` is the parameter kind such as ``POSITIONAL_OR_KEYWORD``;
    ``annotation`` is the annotation's text, for example ``<class 'float'>``.
    A ``default_value`` of ``None`` means the parameter has no default.
    """

    name: str = ""
    full_name: str = ""
    kind: str = ""
    description: str = ""
    default_value: Any = None
    annotation: str = ""


@dataclass
class FunctionInfo:
    """A script function: its names, signature, documentation and parameters."""

    name: str = ""
    full_name: str = ""
    signature: str = ""
    doc: str = ""
    parameters: list[ParameterInfo] = field(default_factory=list)

    def is_creating_function(self) -> bool:
        """Return True if the function creates an image rather than transforming one.

        A function transforms an image when its first parameter is annotated
        as a numpy array; every other function creates one.
        """
        return not self.parameters or self.parameters[0].annotation != NDARRAY_ANNOTATION