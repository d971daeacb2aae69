"""
Registry of ISO 20022 message roots.

Message root classes register themselves at import time with the message
identifier and the tag of the element that sits directly under Document:

    @message("camt.054.001.08", "BkToCstmrDbtCdtNtfctn")
    class BankToCustomerDebitCreditNotificationV08(ISOModel):
        ...

The document namespace is derived from the identifier.
"""

import logging
from dataclasses import dataclass
from typing import Callable, TypeVar

from .errors import UnknownMessageError
from .models import ISOModel

logger = logging.getLogger(__name__)

NAMESPACE_PREFIX = "urn:iso:std:iso:20022:tech:xsd:"

M = TypeVar("M", bound=type[ISOModel])


@dataclass(frozen=True)
class MessageDefinition:
    """A registered message: identifier, root element tag and root model."""
    identifier: str
    root_tag: str
    model: type[ISOModel]

    @property
    def namespace(self) -> str:
        """Document namespace, e.g. urn:iso:std:iso:20022:tech:xsd:camt.054.001.08."""
        return f"{NAMESPACE_PREFIX}{self.identifier}"

    @property
    def business_area(self) -> str:
        """Four letter business area code (camt, acmt, auth...)."""
        return self.identifier.split(".", 1)[0]


_BY_IDENTIFIER: dict[str, MessageDefinition] = {}
_BY_MODEL: dict[type[ISOModel], MessageDefinition] = {}


def message(identifier: str, root_tag: str) -> Callable[[M], M]:
    """Class decorator registering a message root model."""

    def register(model: M) -> M:
        existing = _BY_IDENTIFIER.get(identifier)
        if existing is not None and existing.model is not model:
            raise ValueError(f"Message {identifier} already registered to {existing.model.__name__}")
        definition = MessageDefinition(identifier=identifier, root_tag=root_tag, model=model)
        _BY_IDENTIFIER[identifier] = definition
        _BY_MODEL[model] = definition
        logger.debug("Registered %s as %s", identifier, model.__name__)
        return model

    return register


def get_definition(identifier: str) -> MessageDefinition:
    """Look up a message by identifier, e.g. "camt.054.001.08"."""
    try:
        return _BY_IDENTIFIER[identifier]
    except KeyError:
        raise UnknownMessageError(f"No message registered for identifier {identifier!r}") from None


def definition_for_namespace(namespace: str) -> MessageDefinition:
    """Look up a message by its Document namespace."""
    if not namespace.startswith(NAMESPACE_PREFIX):
        raise UnknownMessageError(f"Not an ISO 20022 message namespace: {namespace!r}")
    return get_definition(namespace[len(NAMESPACE_PREFIX):])


def definition_for_model(model: type[ISOModel]) -> MessageDefinition:
    """Look up the registration of a message root class."""
    try:
        return _BY_MODEL[model]
    except KeyError:
        raise UnknownMessageError(f"{model.__name__} is not a registered message root") from None


def registered_messages() -> list[MessageDefinition]:
    """All registered messages, sorted by identifier."""
    return sorted(_BY_IDENTIFIER.values(), key=lambda d: d.identifier)
