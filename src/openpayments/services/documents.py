"""
ISO 20022 Document handling.

A message travels wrapped in a Document element whose namespace names the
message (urn:iso:std:iso:20022:tech:xsd:camt.054.001.08) and whose single
child is the message root:

    <Document xmlns="urn:iso:std:iso:20022:tech:xsd:camt.054.001.08">
        <BkToCstmrDbtCdtNtfctn>...</BkToCstmrDbtCdtNtfctn>
    </Document>

This module maps between that envelope and the registered root models.

Design Decisions:
- The namespace alone selects the root model; the root tag is checked
  against the registration
- Facet validation is separate from parsing unless validate_on_parse is set,
  so malformed-but-decodable documents can still be inspected
- Keyword arguments left as None fall back to Settings
"""

import logging
from dataclasses import dataclass
from typing import TypeVar

from lxml import etree
from pydantic import ValidationError as PydanticValidationError

import openpayments.iso20022  # noqa: F401  registers message roots
from openpayments.config import get_settings
from openpayments.domain.errors import DecodeError, OpenPaymentsError, ValidationError
from openpayments.domain.models import ISOModel
from openpayments.domain.registry import (
    MessageDefinition,
    definition_for_model,
    definition_for_namespace,
)
from openpayments.infrastructure.xml_codec import (
    model_from_element,
    model_to_element,
    parse_xml,
    qualify,
    serialize,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=ISOModel)

DOCUMENT_TAG = "Document"


@dataclass
class DocumentReport:
    """Outcome of validate_document for one input."""
    identifier: str | None
    error: OpenPaymentsError | None = None
    message: ISOModel | None = None

    @property
    def is_valid(self) -> bool:
        return self.error is None


def message_identifier(message: ISOModel) -> str:
    """Identifier of a registered message root instance, e.g. "camt.054.001.08"."""
    return definition_for_model(type(message)).identifier


def parse_document(
    data: bytes,
    *,
    strict: bool | None = None,
    validate: bool | None = None,
) -> ISOModel:
    """
    Decode an XML Document into its message root model.

    Args:
        data: Raw XML bytes
        strict: Raise on unknown elements and attributes
            (default: Settings.strict_decoding)
        validate: Run facet validation on the decoded message
            (default: Settings.validate_on_parse)

    Returns:
        Instance of the root model registered for the Document namespace

    Raises:
        DecodeError: Malformed XML, wrong envelope or content that does not fit
        UnknownMessageError: Namespace is not a registered message
        ValidationError: A facet does not hold (only when validating)
    """
    settings = get_settings()
    strict = settings.strict_decoding if strict is None else strict
    validate = settings.validate_on_parse if validate is None else validate

    definition, document = _read_envelope(data)
    message = _decode_root(definition, _message_root(definition, document), strict)
    if validate:
        message.validate()
    return message


def _read_envelope(data: bytes) -> tuple[MessageDefinition, etree._Element]:
    """Parse a Document and look up the message its namespace names."""
    document = parse_xml(data)
    name = etree.QName(document)
    if name.localname != DOCUMENT_TAG:
        raise DecodeError(f"Expected <{DOCUMENT_TAG}> root element, got <{name.localname}>")
    if not name.namespace:
        raise DecodeError(f"<{DOCUMENT_TAG}> has no namespace")
    return definition_for_namespace(name.namespace), document


def _message_root(definition: MessageDefinition, document: etree._Element) -> etree._Element:
    roots = list(document.iterchildren(tag=etree.Element))
    if len(roots) != 1:
        raise DecodeError(f"<{DOCUMENT_TAG}> must contain exactly one message, found {len(roots)}")
    tag = etree.QName(roots[0]).localname
    if tag != definition.root_tag:
        raise DecodeError(f"{definition.identifier} expects <{definition.root_tag}>, got <{tag}>")
    return roots[0]


def _decode_root(definition: MessageDefinition, root: etree._Element, strict: bool) -> ISOModel:
    message = model_from_element(definition.model, root, strict=strict)
    logger.debug("Decoded %s document", definition.identifier)
    return message


def render_document(message: ISOModel, *, pretty_print: bool | None = None) -> bytes:
    """
    Encode a message root model as an XML Document.

    Raises:
        UnknownMessageError: If the model is not a registered message root
    """
    settings = get_settings()
    definition = definition_for_model(type(message))
    namespace = definition.namespace

    document = etree.Element(qualify(DOCUMENT_TAG, namespace), nsmap={None: namespace})
    model_to_element(message, definition.root_tag, namespace, parent=document)
    return serialize(
        document,
        pretty_print=settings.xml_pretty_print if pretty_print is None else pretty_print,
        xml_declaration=settings.xml_declaration,
        encoding=settings.xml_encoding,
    )


def validate_document(data: bytes) -> DocumentReport:
    """
    Parse and validate a Document, reporting rather than raising.

    Decoding problems and facet violations both end up in the report's
    error. The identifier is filled in once the envelope names a registered
    message, even when the message body then fails to decode.
    """
    identifier = None
    try:
        definition, document = _read_envelope(data)
        identifier = definition.identifier
        root = _message_root(definition, document)
        message = _decode_root(definition, root, get_settings().strict_decoding)
        message.validate()
    except ValidationError as e:
        logger.info("%s failed validation: %s", identifier, e)
        return DocumentReport(identifier=identifier, error=e, message=message)
    except OpenPaymentsError as e:
        logger.info("Document could not be decoded: %s", e)
        return DocumentReport(identifier=identifier, error=e)
    return DocumentReport(identifier=identifier, message=message)


def to_json(model: ISOModel, *, indent: int | None = None) -> str:
    """Serialize a model to JSON keyed by XML tags, omitting absent fields."""
    return model.model_dump_json(by_alias=True, exclude_none=True, indent=indent)


def from_json(model: type[M], data: str | bytes) -> M:
    """
    Build a model from JSON produced by to_json.

    Raises:
        DecodeError: If the JSON does not fit the model
    """
    try:
        return model.model_validate_json(data)
    except PydanticValidationError as e:
        raise DecodeError(f"JSON does not fit {model.__name__}: {e}") from e
