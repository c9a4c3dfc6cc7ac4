# Copyright 2026 UCDF Contributors
# SPDX-License-Identifier: Apache-2.0

"""Value types for the UCDF data model: source types, access modes, and schema elements."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

from ucdf.errors import InvalidAccessModeError, InvalidSourceTypeError

# ###############
# Public Interface
# ###############


class AccessMode(Enum):
    """Read/write capability of a described data source.

    The enum value is the canonical token used in the ``a`` section.
    """

    READ = "r"
    WRITE = "w"
    READ_WRITE = "rw"

    @classmethod
    def parse(cls, token: str) -> AccessMode:
        """Decode an access token (``r``, ``w`` or ``rw``).

        Raises:
            InvalidAccessModeError: If the token is outside the fixed vocabulary.
        """
        try:
            return cls(token)
        except ValueError:
            raise InvalidAccessModeError(token) from None

    def __str__(self) -> str:
        return self.value


class DataType(Enum):
    """Well-known field type tags. Any other tag is a custom type."""

    STRING = "str"
    INTEGER = "int"
    FLOAT = "float"
    BOOLEAN = "bool"
    DATE = "date"
    DATETIME = "datetime"
    JSON = "json"


class SourceType(BaseModel):
    """Kind of data source, e.g. ``file.csv`` or ``db.postgresql``.

    Attributes:
        category: Broad source family (``file``, ``db``, ``api``, ...). Never
            empty and never contains a dot.
        subtype: Optional refinement of the category. May contain dots.
    """

    model_config = ConfigDict(frozen=True)

    category: str = _Field(min_length=1, pattern=r"^[^.]+$")
    subtype: str | None = None

    @classmethod
    def parse(cls, text: str) -> SourceType:
        """Split a type string on its first dot into category and subtype.

        Raises:
            InvalidSourceTypeError: If the category part is empty.
        """
        category, dot, subtype = text.partition(".")
        if not category:
            raise InvalidSourceTypeError(text)
        return cls(category=category, subtype=subtype if dot else None)

    def __str__(self) -> str:
        if self.subtype is None:
            return self.category
        return f"{self.category}.{self.subtype}"


class Field(BaseModel):
    """A named, typed schema element listed in the ``s.fields`` structure entry.

    Attributes:
        name: Field name. No ``:`` or ``,``.
        type: Free-form type tag such as ``int``, ``str`` or ``decimal``. No
            ``:`` or ``,``.
        extra: Optional descriptor such as a length or a date format. May
            contain ``:`` but no ``,``.
    """

    model_config = ConfigDict(frozen=True)

    name: str = _Field(pattern=r"^[^:,]+$")
    type: str = _Field(pattern=r"^[^:,]+$")
    extra: str | None = _Field(default=None, pattern=r"^[^,]*$")

    @property
    def data_type(self) -> DataType | None:
        """Return the well-known data type for this field's tag, or None for custom tags."""
        try:
            return DataType(self.type)
        except ValueError:
            return None

    def __str__(self) -> str:
        if self.extra is None:
            return f"{self.name}:{self.type}"
        return f"{self.name}:{self.type}:{self.extra}"


class Endpoint(BaseModel):
    """An API endpoint listed in the ``s.endpoints`` structure entry.

    The path may contain ``:`` but no ``,``; the method contains neither.
    """

    model_config = ConfigDict(frozen=True)

    path: str = _Field(pattern=r"^[^,]+$")
    method: str = _Field(pattern=r"^[^:,]+$")

    def __str__(self) -> str:
        return f"{self.path}:{self.method}"
