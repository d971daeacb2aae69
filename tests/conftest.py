"""Shared builders for catalog tests."""

from decimal import Decimal

import pytest

from openpayments.config import get_settings
from openpayments.iso20022.admi_004_001_02 import Event2, SystemEventNotificationV02
from openpayments.iso20022.camt_054_001_08 import (
    AccountNotification17,
    BankToCustomerDebitCreditNotificationV08,
    BankTransactionCodeStructure4,
    CashAccount39,
    EntryStatus1Choice,
    GroupHeader81,
    ReportEntry10,
)
from openpayments.iso20022.common import (
    AccountIdentification4Choice,
    ActiveOrHistoricCurrencyAndAmount,
    CreditDebitCode,
)

CAMT054_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<Document xmlns="urn:iso:std:iso:20022:tech:xsd:camt.054.001.08">
  <BkToCstmrDbtCdtNtfctn>
    <GrpHdr>
      <MsgId>MSG-0001</MsgId>
      <CreDtTm>2024-03-01T10:15:00Z</CreDtTm>
    </GrpHdr>
    <Ntfctn>
      <Id>NTF-1</Id>
      <Acct>
        <Id>
          <IBAN>DE89370400440532013000</IBAN>
        </Id>
      </Acct>
      <Ntry>
        <Amt Ccy="EUR">125.50</Amt>
        <CdtDbtInd>CRDT</CdtDbtInd>
        <RvslInd>false</RvslInd>
        <Sts>
          <Cd>BOOK</Cd>
        </Sts>
        <BkTxCd/>
      </Ntry>
    </Ntfctn>
  </BkToCstmrDbtCdtNtfctn>
</Document>
"""


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are cached; drop the cache around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def camt054_xml() -> bytes:
    return CAMT054_XML


def make_entry(amount: str = "125.50", ccy: str = "EUR") -> ReportEntry10:
    return ReportEntry10(
        amt=ActiveOrHistoricCurrencyAndAmount(ccy=ccy, value=Decimal(amount)),
        cdt_dbt_ind=CreditDebitCode.CRDT,
        rvsl_ind=False,
        sts=EntryStatus1Choice(cd="BOOK"),
        bk_tx_cd=BankTransactionCodeStructure4(),
    )


def make_notification(iban: str = "DE89370400440532013000", **entry) -> BankToCustomerDebitCreditNotificationV08:
    return BankToCustomerDebitCreditNotificationV08(
        grp_hdr=GroupHeader81(msg_id="MSG-0001", cre_dt_tm="2024-03-01T10:15:00Z"),
        ntfctn=[
            AccountNotification17(
                id="NTF-1",
                acct=CashAccount39(id=AccountIdentification4Choice(iban=iban)),
                ntry=[make_entry(**entry)],
            )
        ],
    )


@pytest.fixture
def notification() -> BankToCustomerDebitCreditNotificationV08:
    return make_notification()


@pytest.fixture
def system_event() -> SystemEventNotificationV02:
    return SystemEventNotificationV02(
        evt_inf=Event2(evt_cd="STDY", evt_param=["CYCLE-1"], evt_tm="2024-03-01T06:00:00Z"),
    )


@pytest.fixture
def build_notification():
    """Factory for camt.054 notifications with one overridable entry."""
    return make_notification
