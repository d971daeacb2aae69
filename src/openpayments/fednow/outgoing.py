"""
FedNow outgoing envelope.

Wrapper the FedNow Service puts around a message it sends to a participant:
an optional technical header followed by the message itself. Like the key
exchange messages, the envelope is not an ISO 20022 Document.

Design Decisions:
- The technical header has no published layout, so any content is accepted
  and dropped on decode
- The message is a choice over the key exchange messages; ISO 20022 messages
  carried in the envelope are accepted but not interpreted here
"""

from pydantic import ConfigDict, Field

from openpayments.domain.models import ChoiceModel, ISOModel
from openpayments.fednow.key_exchange import (
    FedNowCustomerMessageSignatureKeyOperationResponse,
    FedNowMessageSignatureKeyExchange,
    FedNowPublicKeyResponses,
    GetAllCustomerPublicKeys,
    GetAllFedNowActivePublicKeys,
    KeyRevocation,
)


class FedNowTechnicalHeader(ISOModel):
    model_config = ConfigDict(extra="allow")


class FedNowOutgoingMessage(ChoiceModel):
    model_config = ConfigDict(extra="allow")

    fed_now_message_signature_key_exchange: FedNowMessageSignatureKeyExchange | None = Field(
        None, alias="FedNowMessageSignatureKeyExchange"
    )
    fed_now_customer_message_signature_key_operation_response: (
        FedNowCustomerMessageSignatureKeyOperationResponse | None
    ) = Field(None, alias="FedNowCustomerMessageSignatureKeyOperationResponse")
    fed_now_public_key_responses: FedNowPublicKeyResponses | None = Field(
        None, alias="FedNowPublicKeyResponses"
    )
    get_all_customer_public_keys: GetAllCustomerPublicKeys | None = Field(
        None, alias="GetAllCustomerPublicKeys"
    )
    get_all_fed_now_active_public_keys: GetAllFedNowActivePublicKeys | None = Field(
        None, alias="GetAllFedNowActivePublicKeys"
    )
    key_revocation: KeyRevocation | None = Field(None, alias="KeyRevocation")


class FedNowOutgoing(ISOModel):
    """Envelope of a message sent by the FedNow Service, carried in <FedNowOutgoing>."""

    fed_now_technical_header: FedNowTechnicalHeader | None = Field(
        None, alias="FedNowTechnicalHeader"
    )
    fed_now_outgoing_message: FedNowOutgoingMessage = Field(alias="FedNowOutgoingMessage")
