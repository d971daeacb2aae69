"""
FedNow message signature key exchange.

Messages a participant uses to register or revoke the public keys that verify its message
signatures, and the responses listing active keys. These are FedNow proprietary messages and are
not wrapped in an ISO 20022 Document.
"""

from pydantic import Field

from openpayments.domain.models import ISOModel
from openpayments.domain.types import SimpleText


class Max300AlphaNumericString(SimpleText):
    pattern = r"[A-Za-z0-9\-_]{1,300}"


class FedNowCustomerMessageSignatureKeyOperationResponse(ISOModel):
    fed_now_key_id: Max300AlphaNumericString = Field(alias="FedNowKeyID")
    status: str = Field(alias="Status")
    error_code: str | None = Field(None, alias="ErrorCode")


class Max50AlphaNumericString(SimpleText):
    pattern = r"[A-Za-z0-9\-_]{1,50}"


class FedNowMessageSignatureKey(ISOModel):
    fed_now_key_id: Max300AlphaNumericString = Field(alias="FedNowKeyID")
    name: Max300AlphaNumericString = Field(alias="Name")
    encoded_public_key: str = Field(alias="EncodedPublicKey")
    encoding: Max50AlphaNumericString = Field(alias="Encoding")
    algorithm: Max50AlphaNumericString | None = Field(None, alias="Algorithm")
    key_creation_date_time: str | None = Field(None, alias="KeyCreationDateTime")


class KeyAddition(ISOModel):
    key: FedNowMessageSignatureKey | None = Field(None, alias="Key")


class FedNowMessageSignatureKeyExchange(ISOModel):
    key_addition: KeyAddition | None = Field(None, alias="KeyAddition")
    key_revocation: str | None = Field(None, alias="KeyRevocation")


class FedNowMessageSignatureKeyStatus(ISOModel):
    key_status: str = Field(alias="KeyStatus")
    status_date_time: str = Field(alias="StatusDateTime")


class FedNowPublicKeyResponse(ISOModel):
    fed_now_message_signature_key_status: FedNowMessageSignatureKeyStatus = Field(
        alias="FedNowMessageSignatureKeyStatus"
    )
    fed_now_message_signature_key: FedNowMessageSignatureKey = Field(
        alias="FedNowMessageSignatureKey"
    )


class FedNowPublicKeyResponses(ISOModel):
    public_keys: list[FedNowPublicKeyResponse] = Field(alias="PublicKeys")


class GetAllCustomerPublicKeys(ISOModel):
    """Request without parameters."""


class GetAllFedNowActivePublicKeys(ISOModel):
    """Request without parameters."""


class Max300Text(SimpleText):
    min_length = 1
    max_length = 300


class KeyRevocation(ISOModel):
    key_revocation: str | None = Field(None, alias="KeyRevocation")
    fed_now_status_description: Max300Text | None = Field(None, alias="FedNowStatusDescription")
    fed_now_key_id: Max300AlphaNumericString | None = Field(None, alias="FedNowKeyID")


class RoutingNumberFRS1(SimpleText):
    """Routing number of a service participant, for a master account or a subaccount."""

    value_name = "routing_number_frs_1"
    pattern = r"[0-9]{9,9}"
