"""Every registered message against a minimal sample Document, plus catalog conventions."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError as PydanticValidationError

from openpayments.domain.errors import ErrorCode, ValidationError
from openpayments.domain.registry import get_definition, registered_messages
from openpayments.fednow.key_exchange import FedNowMessageSignatureKeyExchange, KeyRevocation
from openpayments.fednow.outgoing import FedNowOutgoing, FedNowTechnicalHeader
from openpayments.infrastructure.xml_codec import model_from_element, model_to_element, parse_xml
from openpayments.iso20022.acmt_005_001_06 import AdditionalReference13
from openpayments.iso20022.auth_019_001_04 import TaxExemptReason1Code
from openpayments.iso20022.remittance import (
    AccountSchemeName1Choice,
    GenericAccountIdentification1,
    StructuredRemittanceInformation18,
)
from openpayments.services.documents import (
    from_json,
    parse_document,
    render_document,
    to_json,
    validate_document,
)

SAMPLES = Path(__file__).parent / "samples"
CASES = json.loads((SAMPLES / "cases.json").read_text())


def load_sample(case: dict) -> bytes:
    return (SAMPLES / f"{case['identifier']}.xml").read_bytes()


@pytest.fixture(params=CASES, ids=[case["identifier"] for case in CASES])
def case(request):
    return request.param


class TestSamples:
    def test_every_registered_message_has_a_sample(self):
        assert sorted(case["identifier"] for case in CASES) == [
            definition.identifier for definition in registered_messages()
        ]

    def test_decodes_to_registered_root(self, case):
        message = parse_document(load_sample(case))
        definition = get_definition(case["identifier"])
        assert type(message) is definition.model
        assert type(message).__name__ == case["root"]

    def test_sample_is_valid(self, case):
        report = validate_document(load_sample(case))
        assert report.is_valid, report.error
        assert report.identifier == case["identifier"]

    def test_xml_round_trip(self, case):
        message = parse_document(load_sample(case))
        assert parse_document(render_document(message)) == message

    def test_json_round_trip(self, case):
        message = parse_document(load_sample(case))
        restored = from_json(type(message), to_json(message))
        assert restored == message
        assert render_document(restored) == render_document(message)

    def test_facet_failure_reports_path(self, case):
        data = load_sample(case).replace(
            f">{case['target']}<".encode(), f">{case['value']}<".encode(), 1
        )
        report = validate_document(data)
        assert not report.is_valid
        assert report.identifier == case["identifier"]
        assert report.error.code == case["code"]
        assert report.error.path == case["path"]


class TestInlineFacets:
    def test_choice_alternative(self):
        choice = AccountSchemeName1Choice(Cd="BBAN1")
        with pytest.raises(ValidationError) as exc:
            choice.validate()
        assert exc.value.code == ErrorCode.TOO_LONG
        assert exc.value.message == "cd exceeds the maximum length of 4"
        assert exc.value.path == "Cd"

    def test_required_field_too_short(self):
        with pytest.raises(ValidationError) as exc:
            GenericAccountIdentification1(Id="").validate()
        assert exc.value.code == ErrorCode.TOO_SHORT
        assert exc.value.message == "id is shorter than the minimum length of 1"

    def test_nested_path(self):
        account = GenericAccountIdentification1(Id="12345678", SchmeNm={"Prtry": "x" * 36})
        with pytest.raises(ValidationError) as exc:
            account.validate()
        assert exc.value.path == "SchmeNm.Prtry"

    def test_each_list_item_checked(self):
        info = StructuredRemittanceInformation18(AddtlRmtInf=["Invoice 42", "x" * 141])
        with pytest.raises(ValidationError) as exc:
            info.validate()
        assert exc.value.path == "AddtlRmtInf[1]"
        assert exc.value.message == "addtl_rmt_inf exceeds the maximum length of 140"

    def test_not_checked_on_construction(self):
        choice = AccountSchemeName1Choice(Cd="TOO-LONG")
        assert choice.cd == "TOO-LONG"
        assert not choice.is_valid()

    def test_valid(self):
        assert GenericAccountIdentification1(Id="12345678", SchmeNm={"Cd": "BBAN"}).is_valid()


class TestNaming:
    def test_codes_starting_with_a_digit(self):
        assert TaxExemptReason1Code.CODE_401K.value == "401K"
        assert TaxExemptReason1Code("403B") is TaxExemptReason1Code.CODE_403B

    def test_reference_field(self):
        reference = AdditionalReference13(Ref="REF-1")
        assert reference.ref == "REF-1"
        assert to_json(reference) == '{"Ref":"REF-1"}'


OUTGOING_XML = b"""
<FedNowOutgoing>
  <FedNowTechnicalHeader>
    <MessageID>OUT-1</MessageID>
  </FedNowTechnicalHeader>
  <FedNowOutgoingMessage>
    <KeyRevocation>
      <FedNowKeyID>KEY-1</FedNowKeyID>
      <FedNowStatusDescription>Revoked</FedNowStatusDescription>
    </KeyRevocation>
  </FedNowOutgoingMessage>
</FedNowOutgoing>
"""


class TestFedNowOutgoing:
    def test_decode(self):
        envelope = model_from_element(FedNowOutgoing, parse_xml(OUTGOING_XML), strict=True)
        assert isinstance(envelope.fed_now_technical_header, FedNowTechnicalHeader)
        name, revocation = envelope.fed_now_outgoing_message.selected
        assert name == "key_revocation"
        assert isinstance(revocation, KeyRevocation)
        assert revocation.fed_now_key_id == "KEY-1"
        assert envelope.is_valid()

    def test_round_trip(self):
        envelope = FedNowOutgoing(
            FedNowOutgoingMessage={"FedNowMessageSignatureKeyExchange": {"KeyRevocation": "KEY-1"}}
        )
        element = model_to_element(envelope, "FedNowOutgoing")
        path = "FedNowOutgoingMessage/FedNowMessageSignatureKeyExchange/KeyRevocation"
        assert element.findtext(path) == "KEY-1"
        decoded = model_from_element(FedNowOutgoing, element)
        assert decoded == envelope
        assert isinstance(
            decoded.fed_now_outgoing_message.fed_now_message_signature_key_exchange,
            FedNowMessageSignatureKeyExchange,
        )

    def test_validation_path(self):
        data = OUTGOING_XML.replace(b"Revoked", b"x" * 301)
        envelope = model_from_element(FedNowOutgoing, parse_xml(data))
        with pytest.raises(ValidationError) as exc:
            envelope.validate()
        assert exc.value.code == ErrorCode.TOO_LONG
        assert exc.value.path == "FedNowOutgoingMessage.KeyRevocation.FedNowStatusDescription"
        assert exc.value.message == "max300_text exceeds the maximum length of 300"

    def test_missing_message(self):
        with pytest.raises(PydanticValidationError):
            FedNowOutgoing()
