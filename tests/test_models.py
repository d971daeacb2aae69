"""Composite model construction, validation walk and field layout."""

from decimal import Decimal

import pytest
from pydantic import ValidationError as PydanticValidationError

from openpayments.domain.errors import ErrorCode, ValidationError
from openpayments.domain.models import XmlKind, field_layout
from openpayments.iso20022.camt_054_001_08 import EntryStatus1Choice, GroupHeader81, ReportEntry10
from openpayments.iso20022.common import (
    AccountIdentification4Choice,
    ActiveOrHistoricCurrencyAndAmount,
    CreditDebitCode,
    Max35Text,
    SupplementaryDataEnvelope1,
)


class TestConstruction:
    def test_accepts_aliases_and_field_names(self):
        by_alias = GroupHeader81(MsgId="M1", CreDtTm="2024-01-01T00:00:00")
        by_name = GroupHeader81(msg_id="M1", cre_dt_tm="2024-01-01T00:00:00")
        assert by_alias == by_name

    def test_scalars_become_simple_types(self):
        header = GroupHeader81(msg_id="M1", cre_dt_tm="2024-01-01T00:00:00")
        assert type(header.msg_id) is Max35Text

    def test_missing_required_field(self):
        with pytest.raises(PydanticValidationError):
            GroupHeader81(msg_id="M1")

    def test_unknown_field_rejected(self):
        with pytest.raises(PydanticValidationError):
            GroupHeader81(msg_id="M1", cre_dt_tm="2024-01-01T00:00:00", Foo="bar")

    def test_unknown_code_rejected(self, build_notification):
        entry = build_notification().ntfctn[0].ntry[0]
        data = entry.model_dump(by_alias=True)
        data["CdtDbtInd"] = "XXXX"
        with pytest.raises(PydanticValidationError):
            ReportEntry10.model_validate(data)

    def test_construction_does_not_check_facets(self):
        header = GroupHeader81(msg_id="x" * 50, cre_dt_tm="2024-01-01T00:00:00")
        assert not header.is_valid()


class TestValidate:
    def test_valid_message(self, notification):
        notification.validate()
        assert notification.is_valid()

    def test_error_path_through_lists_and_choices(self, build_notification):
        message = build_notification(iban="not an iban")
        with pytest.raises(ValidationError) as exc:
            message.validate()
        assert exc.value.code == ErrorCode.PATTERN_MISMATCH
        assert exc.value.path == "Ntfctn[0].Acct.Id.IBAN"

    def test_amount_minimum(self, build_notification):
        message = build_notification(amount="-1.00")
        with pytest.raises(ValidationError) as exc:
            message.validate()
        assert exc.value.code == ErrorCode.BELOW_MINIMUM
        assert exc.value.path == "Ntfctn[0].Ntry[0].Amt.Value"

    def test_currency_attribute_pattern(self, build_notification):
        message = build_notification(ccy="eur")
        with pytest.raises(ValidationError) as exc:
            message.validate()
        assert exc.value.path == "Ntfctn[0].Ntry[0].Amt.Ccy"

    def test_first_error_in_field_order_wins(self, build_notification):
        message = build_notification(iban="bad")
        message.grp_hdr.msg_id = Max35Text("")
        with pytest.raises(ValidationError) as exc:
            message.validate()
        assert exc.value.path == "GrpHdr.MsgId"
        assert exc.value.code == ErrorCode.TOO_SHORT

    def test_absent_optionals_skipped(self):
        header = GroupHeader81(msg_id="M1", cre_dt_tm="2024-01-01T00:00:00")
        assert header.addtl_inf is None
        header.validate()


class TestChoice:
    def test_selected(self):
        choice = AccountIdentification4Choice(iban="DE89370400440532013000")
        assert choice.selected == ("iban", "DE89370400440532013000")

    def test_nothing_selected(self):
        assert EntryStatus1Choice().selected is None

    def test_multiple_alternatives_not_rejected(self):
        choice = EntryStatus1Choice(cd="BOOK", prtry="OTHER")
        assert choice.selected == ("cd", "BOOK")
        assert choice.is_valid()


class TestFieldLayout:
    def test_amount_layout(self):
        layout = {spec.name: spec for spec in field_layout(ActiveOrHistoricCurrencyAndAmount)}
        assert layout["ccy"].kind is XmlKind.ATTRIBUTE
        assert layout["ccy"].alias == "Ccy"
        assert layout["value"].kind is XmlKind.CONTENT

    def test_element_layout(self):
        layout = {spec.name: spec for spec in field_layout(ReportEntry10)}
        assert layout["amt"].is_model
        assert layout["amt"].required
        assert layout["ntry_dtls"].repeated
        assert not layout["ntry_dtls"].required
        assert layout["cdt_dbt_ind"].item_type is CreditDebitCode
        assert not layout["cdt_dbt_ind"].is_model

    def test_envelope_accepts_anything(self):
        envelope = SupplementaryDataEnvelope1(Anything={"Nested": "1"})
        envelope.validate()


def test_amount_equality_with_plain_decimal():
    amount = ActiveOrHistoricCurrencyAndAmount(ccy="EUR", value="10.00")
    assert amount.value == Decimal("10")
