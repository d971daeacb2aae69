"""Document envelope handling and the message registry."""

import re
from decimal import Decimal

import pytest
from lxml import etree

from openpayments.config import get_settings
from openpayments.domain.errors import DecodeError, ErrorCode, UnknownMessageError, ValidationError
from openpayments.domain.registry import (
    NAMESPACE_PREFIX,
    definition_for_namespace,
    get_definition,
    message,
    registered_messages,
)
from openpayments.fednow.key_exchange import FedNowPublicKeyResponse
from openpayments.iso20022.admi_004_001_02 import SystemEventNotificationV02
from openpayments.iso20022.camt_054_001_08 import BankToCustomerDebitCreditNotificationV08
from openpayments.services.documents import (
    from_json,
    message_identifier,
    parse_document,
    render_document,
    to_json,
    validate_document,
)


class TestRegistry:
    def test_all_catalog_messages_registered(self):
        identifiers = [definition.identifier for definition in registered_messages()]
        assert identifiers == [
            "acmt.005.001.06",
            "acmt.014.001.05",
            "admi.004.001.02",
            "auth.015.001.02",
            "auth.019.001.04",
            "auth.059.001.01",
            "auth.090.001.02",
            "auth.105.001.01",
            "camt.006.001.11",
            "camt.013.001.04",
            "camt.054.001.08",
            "camt.081.001.02",
            "camt.086.001.05",
            "camt.111.001.01",
            "reda.015.001.01",
            "reda.043.001.02",
        ]

    def test_definition(self):
        definition = get_definition("camt.054.001.08")
        assert definition.model is BankToCustomerDebitCreditNotificationV08
        assert definition.root_tag == "BkToCstmrDbtCdtNtfctn"
        assert definition.namespace == NAMESPACE_PREFIX + "camt.054.001.08"
        assert definition.business_area == "camt"

    def test_lookup_by_namespace(self):
        definition = definition_for_namespace("urn:iso:std:iso:20022:tech:xsd:admi.004.001.02")
        assert definition.model is SystemEventNotificationV02

    def test_unknown_identifier(self):
        with pytest.raises(UnknownMessageError):
            get_definition("pacs.008.001.08")

    def test_foreign_namespace(self):
        with pytest.raises(UnknownMessageError):
            definition_for_namespace("urn:example:payments")

    def test_conflicting_registration(self):
        with pytest.raises(ValueError, match="already registered"):
            message("camt.054.001.08", "BkToCstmrDbtCdtNtfctn")(SystemEventNotificationV02)

    def test_message_identifier(self, notification):
        assert message_identifier(notification) == "camt.054.001.08"

    def test_unregistered_model(self):
        with pytest.raises(UnknownMessageError):
            message_identifier(FedNowPublicKeyResponse.model_construct())


class TestParse:
    def test_parse(self, camt054_xml):
        message = parse_document(camt054_xml)
        assert isinstance(message, BankToCustomerDebitCreditNotificationV08)
        notification = message.ntfctn[0]
        assert notification.acct.id.iban == "DE89370400440532013000"
        assert notification.ntry[0].amt.value == Decimal("125.50")
        assert notification.ntry[0].rvsl_ind is False

    def test_matches_builder(self, camt054_xml, notification):
        assert parse_document(camt054_xml) == notification

    def test_not_a_document(self):
        with pytest.raises(DecodeError, match="Document"):
            parse_document(b"<BkToCstmrDbtCdtNtfctn/>")

    def test_unregistered_namespace(self):
        data = b'<Document xmlns="urn:iso:std:iso:20022:tech:xsd:pacs.008.001.08"><FIToFICstmrCdtTrf/></Document>'
        with pytest.raises(UnknownMessageError):
            parse_document(data)

    def test_wrong_root_tag(self):
        data = b'<Document xmlns="urn:iso:std:iso:20022:tech:xsd:admi.004.001.02"><GetMmb/></Document>'
        with pytest.raises(DecodeError, match="SysEvtNtfctn"):
            parse_document(data)

    def test_validate_on_parse(self, camt054_xml):
        data = camt054_xml.replace(b"DE89370400440532013000", b"not-an-iban")
        parse_document(data)
        with pytest.raises(ValidationError) as exc:
            parse_document(data, validate=True)
        assert exc.value.path == "Ntfctn[0].Acct.Id.IBAN"

    def test_validate_on_parse_setting(self, camt054_xml, monkeypatch):
        monkeypatch.setenv("OPENPAYMENTS_VALIDATE_ON_PARSE", "true")
        data = camt054_xml.replace(b"DE89370400440532013000", b"not-an-iban")
        with pytest.raises(ValidationError):
            parse_document(data)

    def test_strict_setting(self, camt054_xml, monkeypatch):
        data = camt054_xml.replace(b"<BkTxCd/>", b"<BkTxCd/><Extra/>")
        parse_document(data)
        monkeypatch.setenv("OPENPAYMENTS_STRICT_DECODING", "true")
        get_settings.cache_clear()
        with pytest.raises(DecodeError, match="Extra"):
            parse_document(data)


class TestRender:
    def test_envelope(self, notification):
        root = etree.fromstring(render_document(notification))
        namespace = "urn:iso:std:iso:20022:tech:xsd:camt.054.001.08"
        assert root.tag == f"{{{namespace}}}Document"
        assert root[0].tag == f"{{{namespace}}}BkToCstmrDbtCdtNtfctn"
        amount = root.find(f".//{{{namespace}}}Amt")
        assert amount.get("Ccy") == "EUR"
        assert amount.text == "125.50"

    def test_declaration_and_pretty_print(self, system_event):
        data = render_document(system_event)
        assert data.startswith(b"<?xml version='1.0' encoding='UTF-8'?>")
        assert b"\n  <SysEvtNtfctn>" in data
        assert b"\n" not in render_document(system_event, pretty_print=False).split(b"?>", 1)[1].strip()

    def test_round_trip(self, system_event):
        assert parse_document(render_document(system_event)) == system_event

    def test_unregistered_model(self):
        with pytest.raises(UnknownMessageError):
            render_document(FedNowPublicKeyResponse.model_construct())


class TestValidateDocument:
    def test_valid(self, camt054_xml):
        report = validate_document(camt054_xml)
        assert report.is_valid
        assert report.identifier == "camt.054.001.08"
        assert report.error is None

    def test_facet_failure(self, camt054_xml):
        report = validate_document(camt054_xml.replace(b"MSG-0001", b"M" * 36))
        assert not report.is_valid
        assert report.identifier == "camt.054.001.08"
        assert report.error.code == ErrorCode.TOO_LONG
        assert report.error.path == "GrpHdr.MsgId"
        assert report.message is not None

    def test_decode_failure(self):
        report = validate_document(b"not xml")
        assert not report.is_valid
        assert report.identifier is None
        assert isinstance(report.error, DecodeError)

    def test_body_decode_failure_keeps_identifier(self, camt054_xml):
        data = re.sub(rb"<CdtDbtInd>\w+</CdtDbtInd>", b"", camt054_xml)
        report = validate_document(data)
        assert not report.is_valid
        assert report.identifier == "camt.054.001.08"
        assert isinstance(report.error, DecodeError)
        assert report.message is None

    def test_wrong_root_tag_keeps_identifier(self):
        data = b'<Document xmlns="urn:iso:std:iso:20022:tech:xsd:admi.004.001.02"><GetMmb/></Document>'
        report = validate_document(data)
        assert report.identifier == "admi.004.001.02"
        assert isinstance(report.error, DecodeError)

    def test_unregistered_namespace(self):
        data = b'<Document xmlns="urn:iso:std:iso:20022:tech:xsd:pacs.008.001.08"><FIToFICstmrCdtTrf/></Document>'
        report = validate_document(data)
        assert report.identifier is None
        assert isinstance(report.error, UnknownMessageError)


class TestJson:
    def test_aliases_and_absent_fields(self, notification):
        data = to_json(notification)
        assert '"GrpHdr"' in data
        assert '"Ccy":"EUR"' in data
        assert "NtryRef" not in data

    def test_round_trip(self, notification):
        restored = from_json(BankToCustomerDebitCreditNotificationV08, to_json(notification))
        assert restored == notification
        restored.validate()

    def test_bad_json(self):
        with pytest.raises(DecodeError):
            from_json(SystemEventNotificationV02, '{"EvtInf": {}}')
