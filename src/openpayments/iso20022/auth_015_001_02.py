"""
auth.015.001.02 - MoneyMarketOvernightIndexSwapsStatisticalReportV02

Money market overnight index swaps statistical report, sent by reporting agents to the central
bank.

Only the types specific to this message are declared here; shared types come from
openpayments.iso20022.common.
"""

from decimal import Decimal
from enum import Enum

from pydantic import Field

from openpayments.domain.models import ChoiceModel, ISOModel
from openpayments.domain.registry import message
from openpayments.domain.types import SimpleText
from openpayments.iso20022.common import (
    ActiveCurrencyAndAmount,
    CountryCode,
    DateTimePeriod1,
    ISODate,
    ISODateTime,
    LEIIdentifier,
    Max105Text,
    Max70Text,
    SupplementaryData1,
)


class NameAndLocation1(ISOModel):
    nm: Max70Text = Field(alias="Nm")
    lctn: CountryCode = Field(alias="Lctn")


class SectorAndLocation1(ISOModel):
    sctr: str = Field(alias="Sctr")
    lctn: CountryCode = Field(alias="Lctn")


class CounterpartyIdentification3Choice(ChoiceModel):
    lei: LEIIdentifier | None = Field(None, alias="LEI")
    sctr_and_lctn: SectorAndLocation1 | None = Field(None, alias="SctrAndLctn")
    nm_and_lctn: NameAndLocation1 | None = Field(None, alias="NmAndLctn")


class DateAndDateTimeChoice(ChoiceModel):
    dt: ISODate | None = Field(None, alias="Dt")
    dt_tm: ISODateTime | None = Field(None, alias="DtTm")


class MoneyMarketReportHeader1(ISOModel):
    rptg_agt: LEIIdentifier = Field(alias="RptgAgt")
    ref_prd: DateTimePeriod1 = Field(alias="RefPrd")


class NovationStatus1Code(str, Enum):
    NONO = "NONO"
    NOVA = "NOVA"


class OvernightIndexSwapType1Code(str, Enum):
    PAID = "PAID"
    RECE = "RECE"


class TransactionOperationType1Code(str, Enum):
    AMND = "AMND"
    CANC = "CANC"
    CORR = "CORR"
    NEWT = "NEWT"


class OvernightIndexSwapTransaction4(ISOModel):
    rptd_tx_sts: TransactionOperationType1Code = Field(alias="RptdTxSts")
    nvtn_sts: NovationStatus1Code | None = Field(None, alias="NvtnSts")
    brnch_id: LEIIdentifier | None = Field(None, alias="BrnchId")
    unq_tx_idr: Max105Text | None = Field(None, alias="UnqTxIdr")
    prtry_tx_id: Max105Text = Field(alias="PrtryTxId")
    rltd_prtry_tx_id: Max105Text | None = Field(None, alias="RltdPrtryTxId")
    ctr_pty_prtry_tx_id: Max105Text | None = Field(None, alias="CtrPtyPrtryTxId")
    ctr_pty_id: CounterpartyIdentification3Choice = Field(alias="CtrPtyId")
    trad_dt: DateAndDateTimeChoice = Field(alias="TradDt")
    start_dt: ISODate = Field(alias="StartDt")
    mtrty_dt: ISODate = Field(alias="MtrtyDt")
    fxd_intrst_rate: Decimal = Field(alias="FxdIntrstRate")
    tx_tp: OvernightIndexSwapType1Code = Field(alias="TxTp")
    tx_nmnl_amt: ActiveCurrencyAndAmount = Field(alias="TxNmnlAmt")
    splmtry_data: list[SupplementaryData1] | None = Field(None, alias="SplmtryData")


class ReportPeriodActivity3Code(str, Enum):
    NOTX = "NOTX"
    NORA = "NORA"


class OvernightIndexSwap4Choice(ChoiceModel):
    data_set_actn: ReportPeriodActivity3Code | None = Field(None, alias="DataSetActn")
    tx: list[OvernightIndexSwapTransaction4] | None = Field(None, alias="Tx")


@message("auth.015.001.02", "MnyMktOvrnghtIndxSwpsSttstclRpt")
class MoneyMarketOvernightIndexSwapsStatisticalReportV02(ISOModel):
    """
    Message root of auth.015.001.02, carried in the
    <MnyMktOvrnghtIndxSwpsSttstclRpt> element.
    """

    rpt_hdr: MoneyMarketReportHeader1 = Field(alias="RptHdr")
    ovrnght_indx_swps_rpt: OvernightIndexSwap4Choice = Field(alias="OvrnghtIndxSwpsRpt")
    splmtry_data: list[SupplementaryData1] | None = Field(None, alias="SplmtryData")


class SNA2008SectorIdentifier(SimpleText):
    pass
