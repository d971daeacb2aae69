"""
Base models for ISO 20022 message components.

Every composite type in the catalog derives from ISOModel. Fields carry their
XML tag as the pydantic alias, so the declarations double as serialization
directives for both JSON (model_dump(by_alias=True)) and the XML codec.

Design Decisions:
- pydantic enforces shape at construction (required fields, enum codes,
  decimal syntax); validate() checks schema facets afterwards, so a model
  can be built from partial or dirty input and inspected before validation
- validate() walks fields in declaration order and stops at the first error,
  prefixing the error path with each alias on the way out
- XML placement (element, attribute, text content) lives in field metadata;
  elements are the default and need no marker
- Choice types are records of optionals; nothing enforces that exactly one
  alternative is populated
"""

import types
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Any, Union, get_args, get_origin

from pydantic import BaseModel, ConfigDict, Field

from .errors import ValidationError
from .types import Facets, SimpleType


class XmlKind(str, Enum):
    """Where a field lives in the XML representation."""
    ELEMENT = "element"
    ATTRIBUTE = "attribute"
    CONTENT = "content"


CONTENT_ALIAS = "Value"


def attribute(alias: str, default: Any = ...) -> Any:
    """Declare a field serialized as an XML attribute (e.g. Ccy on amounts)."""
    return Field(default, alias=alias, json_schema_extra={"xml": XmlKind.ATTRIBUTE.value})


def content(default: Any = ...) -> Any:
    """Declare the field holding an element's text content."""
    return Field(default, alias=CONTENT_ALIAS, json_schema_extra={"xml": XmlKind.CONTENT.value})


class ISOModel(BaseModel):
    """
    Base class for composite ISO 20022 types.

    Construction accepts XML tags (aliases) or Python field names.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    def validate(self) -> None:
        """
        Validate every populated field, recursing into nested components.

        Raises:
            ValidationError: For the first facet that does not hold, with
                path set to the alias path of the offending value
        """
        for name, info in type(self).model_fields.items():
            value = getattr(self, name)
            if value is None:
                continue
            label = info.alias or name
            facets = _field_facets(info)
            if isinstance(value, list):
                for index, item in enumerate(value):
                    _validate_member(item, f"{label}[{index}]", name, facets)
            else:
                _validate_member(value, label, name, facets)

    def is_valid(self) -> bool:
        """True if validate() passes."""
        try:
            self.validate()
        except ValidationError:
            return False
        return True


class ChoiceModel(ISOModel):
    """
    Base class for XML Schema choice types.

    Alternatives are all optional. selected reports the first populated one
    without requiring that it is the only one.
    """

    @property
    def selected(self) -> tuple[str, Any] | None:
        """(field name, value) of the first populated alternative."""
        for name in type(self).model_fields:
            value = getattr(self, name)
            if value is not None:
                return name, value
        return None


def _field_facets(info: Any) -> Facets | None:
    for item in info.metadata:
        if isinstance(item, Facets):
            return item
    return None


def _validate_member(value: Any, segment: str, name: str, facets: Facets | None) -> None:
    # Enums, bools and plain scalars without inline facets carry nothing to check
    try:
        if facets is not None:
            facets.check(name, value)
        elif isinstance(value, (ISOModel, SimpleType)):
            value.validate()
    except ValidationError as exc:
        exc.prepend(segment)
        raise


@dataclass(frozen=True)
class FieldLayout:
    """How one model field maps onto XML."""
    name: str
    alias: str
    kind: XmlKind
    item_type: Any
    repeated: bool
    required: bool

    @property
    def is_model(self) -> bool:
        return isinstance(self.item_type, type) and issubclass(self.item_type, ISOModel)


def _unwrap(annotation: Any) -> tuple[Any, bool]:
    """Strip Optional and list from an annotation: (item type, repeated)."""
    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        return _unwrap(args[0])
    if origin is list:
        return get_args(annotation)[0], True
    return annotation, False


@lru_cache(maxsize=None)
def field_layout(model: type[ISOModel]) -> tuple[FieldLayout, ...]:
    """Resolve the XML layout of a model class once and cache it."""
    layout = []
    for name, info in model.model_fields.items():
        extra = info.json_schema_extra if isinstance(info.json_schema_extra, dict) else {}
        item_type, repeated = _unwrap(info.annotation)
        layout.append(
            FieldLayout(
                name=name,
                alias=info.alias or name,
                kind=XmlKind(extra.get("xml", XmlKind.ELEMENT.value)),
                item_type=item_type,
                repeated=repeated,
                required=info.is_required(),
            )
        )
    return tuple(layout)
