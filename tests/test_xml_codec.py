"""XML codec on individual models."""

from decimal import Decimal

import pytest
from lxml import etree

from openpayments.domain.errors import DecodeError
from openpayments.fednow.key_exchange import (
    FedNowMessageSignatureKey,
    FedNowMessageSignatureKeyExchange,
    KeyAddition,
)
from openpayments.infrastructure.xml_codec import (
    model_from_element,
    model_to_element,
    parse_xml,
    to_text,
)
from openpayments.iso20022.camt_054_001_08 import ReportEntry10
from openpayments.iso20022.common import (
    ActiveOrHistoricCurrencyAndAmount,
    CreditDebitCode,
    SupplementaryData1,
)

ENTRY_XML = b"""
<Ntry>
  <Amt Ccy="USD">1000</Amt>
  <CdtDbtInd>DBIT</CdtDbtInd>
  <Sts><Prtry>PENDING</Prtry></Sts>
  <BkTxCd/>
</Ntry>
"""


def test_to_text():
    assert to_text(CreditDebitCode.CRDT) == "CRDT"
    assert to_text(True) == "true"
    assert to_text(False) == "false"
    assert to_text(Decimal("1E+2")) == "100"
    assert to_text(Decimal("12.50")) == "12.50"


def test_amount_encodes_attribute_and_text():
    amount = ActiveOrHistoricCurrencyAndAmount(ccy="EUR", value=Decimal("12.50"))
    element = model_to_element(amount, "Amt")
    assert element.tag == "Amt"
    assert element.get("Ccy") == "EUR"
    assert element.text == "12.50"
    assert len(element) == 0


def test_namespace_applies_to_descendants():
    amount = ActiveOrHistoricCurrencyAndAmount(ccy="EUR", value=Decimal("1"))
    element = model_to_element(amount, "Amt", "urn:example")
    assert etree.QName(element).namespace == "urn:example"


def test_decode_entry():
    entry = model_from_element(ReportEntry10, parse_xml(ENTRY_XML))
    assert entry.amt.ccy == "USD"
    assert entry.amt.value == Decimal("1000")
    assert entry.cdt_dbt_ind is CreditDebitCode.DBIT
    assert entry.sts.selected == ("prtry", "PENDING")
    assert entry.rvsl_ind is None


def test_element_order_follows_declaration(build_notification):
    entry = build_notification().ntfctn[0].ntry[0]
    element = model_to_element(entry, "Ntry")
    assert [child.tag for child in element] == ["Amt", "CdtDbtInd", "RvslInd", "Sts", "BkTxCd"]
    assert element.find("RvslInd").text == "false"


def test_unknown_element_skipped_by_default(caplog):
    data = ENTRY_XML.replace(b"<BkTxCd/>", b"<BkTxCd/><Bogus>1</Bogus>")
    entry = model_from_element(ReportEntry10, parse_xml(data))
    assert entry.cdt_dbt_ind is CreditDebitCode.DBIT
    assert "Bogus" in caplog.text


def test_unknown_element_strict():
    data = ENTRY_XML.replace(b"<BkTxCd/>", b"<BkTxCd/><Bogus>1</Bogus>")
    with pytest.raises(DecodeError, match="Bogus"):
        model_from_element(ReportEntry10, parse_xml(data), strict=True)


def test_unknown_attribute_strict():
    data = ENTRY_XML.replace(b'Ccy="USD"', b'Ccy="USD" Foo="1"')
    with pytest.raises(DecodeError, match="Foo"):
        model_from_element(ReportEntry10, parse_xml(data), strict=True)


def test_missing_required_element():
    data = ENTRY_XML.replace(b"<CdtDbtInd>DBIT</CdtDbtInd>", b"")
    with pytest.raises(DecodeError, match="ReportEntry10"):
        model_from_element(ReportEntry10, parse_xml(data))


def test_bad_code_is_decode_error():
    data = ENTRY_XML.replace(b"DBIT", b"BOTH")
    with pytest.raises(DecodeError):
        model_from_element(ReportEntry10, parse_xml(data))


def test_malformed_xml():
    with pytest.raises(DecodeError, match="Malformed"):
        parse_xml(b"<Ntry><Amt>")


def test_entities_not_expanded():
    data = b"""<?xml version="1.0"?>
<!DOCTYPE Ntry [<!ENTITY x SYSTEM "file:///etc/passwd">]>
<Ntry><Amt Ccy="USD">1</Amt><CdtDbtInd>&x;</CdtDbtInd><Sts/><BkTxCd/></Ntry>
"""
    with pytest.raises(DecodeError):
        model_from_element(ReportEntry10, parse_xml(data))


def test_extension_envelope_content_dropped_even_when_strict():
    data = b"""
<SplmtryData>
  <PlcAndNm>/Document</PlcAndNm>
  <Envlp><Custom><Ref>1</Ref></Custom></Envlp>
</SplmtryData>
"""
    supplementary = model_from_element(SupplementaryData1, parse_xml(data), strict=True)
    assert supplementary.plc_and_nm == "/Document"


def test_fednow_key_exchange_round_trip():
    exchange = FedNowMessageSignatureKeyExchange(
        key_addition=KeyAddition(
            key=FedNowMessageSignatureKey(
                fed_now_key_id="KEY-1",
                name="primary",
                encoded_public_key="MFkwEwYHKoZIzj0CAQYIKoZIzj0DAQcDQgAE",
                encoding="PEM",
                algorithm="ES256",
            )
        )
    )
    element = model_to_element(exchange, "FedNowMessageSignatureKeyExchange")
    assert element.findtext("KeyAddition/Key/FedNowKeyID") == "KEY-1"
    decoded = model_from_element(FedNowMessageSignatureKeyExchange, element)
    assert decoded == exchange
    decoded.validate()
