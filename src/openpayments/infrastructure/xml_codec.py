"""
XML codec for catalog models.

Converts between lxml elements and ISOModel instances using nothing but the
declarative field metadata: the alias is the tag, and the field's XmlKind
says whether it is a child element, an attribute or the element's text.

Decoding collects raw strings into an alias-keyed dict and hands it to
pydantic, which does all scalar conversion (decimals, booleans, enum codes,
simple types). Encoding is the mirror image.

Design Decisions:
- Hardened parser: no entity resolution, no network access
- Unknown elements and attributes are logged and skipped unless strict
- Leaf text is passed through untouched; whitespace is significant for
  text simple types
- Decimals are written in plain notation, never exponent form
"""

import logging
from decimal import Decimal
from enum import Enum
from typing import Any, TypeVar

from lxml import etree
from pydantic import ValidationError as PydanticValidationError

from openpayments.domain.errors import DecodeError
from openpayments.domain.models import ISOModel, XmlKind, field_layout

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=ISOModel)

# Attributes that belong to XML itself rather than to a schema type
_RESERVED_ATTRIBUTE_NAMESPACES = (
    "http://www.w3.org/2000/xmlns/",
    "http://www.w3.org/2001/XMLSchema-instance",
)


def qualify(tag: str, namespace: str | None) -> str:
    """Clark notation tag ({namespace}tag) or the bare tag without namespace."""
    return f"{{{namespace}}}{tag}" if namespace else tag


def to_text(value: Any) -> str:
    """Render a scalar field value as XML text."""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


# =============================================================================
# Encoding
# =============================================================================

def model_to_element(
    model: ISOModel,
    tag: str,
    namespace: str | None = None,
    parent: etree._Element | None = None,
) -> etree._Element:
    """
    Build the element for a model.

    Args:
        model: The model to encode
        tag: Local name of the element
        namespace: Namespace shared by the element and all its descendants
        parent: Attach the new element under this parent if given

    Returns:
        The new element
    """
    name = qualify(tag, namespace)
    if parent is None:
        element = etree.Element(name, nsmap={None: namespace} if namespace else None)
    else:
        element = etree.SubElement(parent, name)

    for spec in field_layout(type(model)):
        value = getattr(model, spec.name)
        if value is None:
            continue
        if spec.kind is XmlKind.ATTRIBUTE:
            element.set(spec.alias, to_text(value))
        elif spec.kind is XmlKind.CONTENT:
            element.text = to_text(value)
        else:
            for item in value if spec.repeated else (value,):
                if isinstance(item, ISOModel):
                    model_to_element(item, spec.alias, namespace, parent=element)
                else:
                    child = etree.SubElement(element, qualify(spec.alias, namespace))
                    child.text = to_text(item)
    return element


def serialize(
    element: etree._Element,
    *,
    pretty_print: bool = True,
    xml_declaration: bool = True,
    encoding: str = "UTF-8",
) -> bytes:
    """Serialize an element tree to bytes."""
    return etree.tostring(
        element,
        pretty_print=pretty_print,
        xml_declaration=xml_declaration,
        encoding=encoding,
    )


# =============================================================================
# Decoding
# =============================================================================

def parse_xml(data: bytes) -> etree._Element:
    """
    Parse XML bytes into a root element.

    Raises:
        DecodeError: If the input is not well-formed XML
    """
    parser = etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        remove_blank_text=True,
        remove_comments=True,
    )
    try:
        return etree.fromstring(data, parser)
    except etree.XMLSyntaxError as e:
        raise DecodeError(f"Malformed XML: {e}") from e


def model_from_element(model: type[M], element: etree._Element, *, strict: bool = False) -> M:
    """
    Decode an element into an instance of model.

    Args:
        model: Target model class
        element: Element whose children and attributes map onto model fields
        strict: Raise on unknown elements and attributes instead of skipping them

    Raises:
        DecodeError: On unknown content in strict mode, or when the decoded
            data does not fit the model (missing required field, bad code...)
    """
    data = _read_element(model, element, strict)
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        raise DecodeError(f"<{etree.QName(element).localname}> does not fit {model.__name__}: {e}") from e


def _read_element(model: type[ISOModel], element: etree._Element, strict: bool) -> dict[str, Any]:
    layout = field_layout(model)
    children = {spec.alias: spec for spec in layout if spec.kind is XmlKind.ELEMENT}
    attributes = {spec.alias: spec for spec in layout if spec.kind is XmlKind.ATTRIBUTE}
    # Extension envelopes accept any content; it is not carried into the model
    open_content = model.model_config.get("extra") == "allow"
    data: dict[str, Any] = {}

    for spec in layout:
        if spec.kind is XmlKind.CONTENT and element.text is not None:
            data[spec.alias] = element.text

    for name, value in element.attrib.items():
        if name in attributes:
            data[name] = value
        elif not name.startswith(tuple(f"{{{ns}}}" for ns in _RESERVED_ATTRIBUTE_NAMESPACES)):
            _unknown(f"attribute {name!r} on <{etree.QName(element).localname}>", strict)

    for child in element.iterchildren(tag=etree.Element):
        tag = etree.QName(child).localname
        spec = children.get(tag)
        if spec is None:
            if open_content:
                logger.debug("Dropping extension content <%s>", tag)
                continue
            _unknown(f"element <{tag}> in <{etree.QName(element).localname}>", strict)
            continue
        value = _read_element(spec.item_type, child, strict) if spec.is_model else (child.text or "")
        if spec.repeated:
            data.setdefault(tag, []).append(value)
        else:
            if tag in data:
                _unknown(f"repeated element <{tag}>", strict)
            data[tag] = value
    return data


def _unknown(what: str, strict: bool) -> None:
    if strict:
        raise DecodeError(f"Unexpected {what}")
    logger.warning("Skipping unexpected %s", what)
