"""Facet validation of simple types."""

from decimal import Decimal

import pytest

from openpayments.domain.errors import ErrorCode, ValidationError
from openpayments.domain.types import SimpleDecimal, SimpleText
from openpayments.fednow.key_exchange import Max300AlphaNumericString, RoutingNumberFRS1
from openpayments.iso20022.common import (
    ActiveCurrencyCode,
    ActiveOrHistoricCurrencyAndAmountSimpleType,
    BICFIDec2014Identifier,
    ISODateTime,
    Max35Text,
    Max4AlphaNumericText,
)


class TestSimpleText:
    def test_within_bounds(self):
        Max35Text("MSG-0001").validate()
        assert Max35Text("x" * 35).is_valid()

    def test_empty_is_too_short(self):
        with pytest.raises(ValidationError) as exc:
            Max35Text("").validate()
        assert exc.value.code == ErrorCode.TOO_SHORT
        assert exc.value.code == 1001
        assert exc.value.message == "max35_text is shorter than the minimum length of 1"
        assert exc.value.path == ""

    def test_too_long(self):
        with pytest.raises(ValidationError) as exc:
            Max35Text("x" * 36).validate()
        assert exc.value.code == 1002
        assert "maximum length of 35" in exc.value.message

    def test_length_counts_characters(self):
        assert Max35Text("é" * 35).is_valid()

    def test_pattern_found_anywhere_in_value(self):
        assert BICFIDec2014Identifier("DEUTDEFF").is_valid()
        assert BICFIDec2014Identifier("DEUTDEFF5").is_valid()
        assert ActiveCurrencyCode("EURO").is_valid()
        assert ActiveCurrencyCode(" EUR").is_valid()

    def test_pattern_mismatch(self):
        with pytest.raises(ValidationError) as exc:
            BICFIDec2014Identifier("deutdeff").validate()
        assert exc.value.code == ErrorCode.PATTERN_MISMATCH
        assert exc.value.message == "bicfi_dec2014_identifier does not match the required pattern"
        assert not ActiveCurrencyCode("eur").is_valid()

    def test_length_checked_before_pattern(self):
        with pytest.raises(ValidationError) as exc:
            Max4AlphaNumericText("ABCDE").validate()
        assert exc.value.code == ErrorCode.TOO_LONG

    def test_no_facets_always_valid(self):
        assert ISODateTime("whatever").is_valid()

    def test_pattern_only_type(self):
        assert Max300AlphaNumericString("key-1_A").is_valid()
        assert Max300AlphaNumericString("key 1").is_valid()
        assert not Max300AlphaNumericString("!!!").is_valid()

    def test_message_names_value_in_snake_case(self):
        with pytest.raises(ValidationError) as exc:
            Max4AlphaNumericText("ABCDE").validate()
        assert exc.value.message == "max4_alpha_numeric_text exceeds the maximum length of 4"

    def test_declared_value_name(self):
        with pytest.raises(ValidationError) as exc:
            RoutingNumberFRS1("ABC").validate()
        assert exc.value.message == "routing_number_frs_1 does not match the required pattern"

    def test_behaves_as_str(self):
        value = Max35Text("ABC")
        assert value == "ABC"
        assert isinstance(value, str)
        assert repr(value) == "Max35Text('ABC')"


class TestSimpleDecimal:
    def test_minimum_inclusive(self):
        ActiveOrHistoricCurrencyAndAmountSimpleType(Decimal("0")).validate()
        assert ActiveOrHistoricCurrencyAndAmountSimpleType("0.01").is_valid()

    def test_below_minimum(self):
        with pytest.raises(ValidationError) as exc:
            ActiveOrHistoricCurrencyAndAmountSimpleType("-0.01").validate()
        assert exc.value.code == ErrorCode.BELOW_MINIMUM
        assert exc.value.code == 1003
        assert exc.value.message == (
            "active_or_historic_currency_and_amount_simple_type is less than the minimum value of 0.000000"
        )

    def test_behaves_as_decimal(self):
        value = ActiveOrHistoricCurrencyAndAmountSimpleType("12.50")
        assert value == Decimal("12.5")
        assert value + 1 == Decimal("13.50")


class TestCustomTypes:
    def test_subclass_inherits_facets(self):
        class Code(SimpleText):
            max_length = 2
            pattern = r"[A-Z]+"

        class ShortCode(Code):
            max_length = 1

        assert Code("AB").is_valid()
        assert not ShortCode("AB").is_valid()
        assert not ShortCode("a").is_valid()

    def test_value_name_derived_from_class_name(self):
        class ISOCountryCode(SimpleText):
            pass

        class Max140Text(SimpleText):
            value_name = "nm"

        assert ISOCountryCode.value_name == "iso_country_code"
        assert Max140Text.value_name == "nm"

    def test_decimal_without_minimum(self):
        class Rate(SimpleDecimal):
            pass

        assert Rate("-5").is_valid()


def test_error_string_includes_code_and_path():
    error = ValidationError(ErrorCode.TOO_LONG, "max35_text exceeds the maximum length of 35", "Id")
    error.prepend("Acct")
    error.prepend("Ntfctn[0]")
    assert error.path == "Ntfctn[0].Acct.Id"
    assert str(error) == "[1002] Ntfctn[0].Acct.Id: max35_text exceeds the maximum length of 35"
