"""
Base classes for ISO 20022 simple types.

A simple type wraps one scalar and declares its schema facets as class
attributes. Subclasses are real str / Decimal subclasses, so a Max35Text
compares equal to the plain string it holds and serializes as that string.

    class Max35Text(SimpleText):
        min_length = 1
        max_length = 35

pydantic converts raw input into the subclass through
__get_pydantic_core_schema__, so model fields typed with a simple type accept
plain strings or decimals as well as instances.

Fields whose rules are declared inline rather than through a named simple type
carry a Facets marker in their Annotated metadata instead:

    cd: Annotated[str | None, Facets(min_length=1, max_length=4)] = Field(None, alias="Cd")
"""

import re
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, ClassVar

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from .errors import ValidationError
from .validation import check_facets


def snake_case(name: str) -> str:
    """Max35Text -> max35_text, ISODateTime -> iso_date_time."""
    name = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", name)
    name = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", name)
    return name.lower()


@dataclass(frozen=True)
class Facets:
    """Facets declared on a single field rather than on a simple type."""

    min_length: int | None = None
    max_length: int | None = None
    min_inclusive: Decimal | None = None
    pattern: str | None = None
    compiled: re.Pattern[str] | None = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.pattern:
            object.__setattr__(self, "compiled", re.compile(self.pattern))

    def check(self, name: str, value: str | Decimal) -> None:
        check_facets(
            name,
            value,
            min_length=self.min_length,
            max_length=self.max_length,
            min_inclusive=self.min_inclusive,
            pattern=self.compiled,
        )


class SimpleType:
    """Mixin holding the facet declarations shared by all simple types."""

    min_length: ClassVar[int | None] = None
    max_length: ClassVar[int | None] = None
    min_inclusive: ClassVar[Decimal | None] = None
    pattern: ClassVar[str | None] = None

    # Name used in error messages; derived from the class name unless declared
    value_name: ClassVar[str] = ""

    _compiled: ClassVar[re.Pattern[str] | None] = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        # Compile once per class; subclasses without their own pattern inherit it
        if "pattern" in cls.__dict__:
            cls._compiled = re.compile(cls.pattern) if cls.pattern else None
        if "value_name" not in cls.__dict__:
            cls.value_name = snake_case(cls.__name__)

    @classmethod
    def _scalar_schema(cls) -> core_schema.CoreSchema:
        raise NotImplementedError

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_after_validator_function(cls, cls._scalar_schema())

    def validate(self) -> None:
        raise NotImplementedError

    def is_valid(self) -> bool:
        """True if validate() passes."""
        try:
            self.validate()
        except ValidationError:
            return False
        return True


class SimpleText(SimpleType, str):
    """String-valued simple type (MaxNText, identifiers, external codes...)."""

    @classmethod
    def _scalar_schema(cls) -> core_schema.CoreSchema:
        return core_schema.str_schema()

    def validate(self) -> None:
        """
        Check length and pattern facets in schema order.

        Raises:
            ValidationError: 1001 too short, 1002 too long, 1005 pattern mismatch
        """
        check_facets(
            self.value_name,
            self,
            min_length=self.min_length,
            max_length=self.max_length,
            pattern=self._compiled,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str.__repr__(self)})"


class SimpleDecimal(SimpleType, Decimal):
    """Decimal-valued simple type (amounts, rates, decimal numbers)."""

    @classmethod
    def _scalar_schema(cls) -> core_schema.CoreSchema:
        return core_schema.decimal_schema()

    def validate(self) -> None:
        """
        Check the minimum-value facet.

        Raises:
            ValidationError: 1003 below minimum
        """
        check_facets(self.value_name, self, min_inclusive=self.min_inclusive)

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{Decimal.__str__(self)}')"
