"""
auth.059.001.01 - CCPIncomeStatementAndCapitalAdequacyReportV01

CCP income statement and capital adequacy report, sent by a central counterparty to its national
competent authority.

Only the types specific to this message are declared here; shared types come from
openpayments.iso20022.common.
"""

from decimal import Decimal

from pydantic import Field

from openpayments.domain.models import ISOModel
from openpayments.domain.registry import message
from openpayments.iso20022.common import (
    ActiveCurrencyAndAmount,
    Max35Text,
    SupplementaryData1,
)


class AmountAndDirection102(ISOModel):
    amt: ActiveCurrencyAndAmount = Field(alias="Amt")
    sgn: bool = Field(alias="Sgn")


class CapitalRequirement1(ISOModel):
    wndg_dwn_or_rstrg_rsk: ActiveCurrencyAndAmount = Field(alias="WndgDwnOrRstrgRsk")
    oprl_and_lgl_rsk: ActiveCurrencyAndAmount = Field(alias="OprlAndLglRsk")
    cdt_rsk: ActiveCurrencyAndAmount = Field(alias="CdtRsk")
    cntr_pty_rsk: ActiveCurrencyAndAmount = Field(alias="CntrPtyRsk")
    mkt_rsk: ActiveCurrencyAndAmount = Field(alias="MktRsk")
    biz_rsk: ActiveCurrencyAndAmount = Field(alias="BizRsk")
    ntfctn_bffr: Decimal | None = Field(None, alias="NtfctnBffr")


class HypotheticalCapitalMeasure1(ISOModel):
    amt: ActiveCurrencyAndAmount = Field(alias="Amt")
    dflt_wtrfll_id: Max35Text = Field(alias="DfltWtrfllId")


class IncomeStatement1(ISOModel):
    clr_fees: ActiveCurrencyAndAmount = Field(alias="ClrFees")
    othr_oprg_rvn: ActiveCurrencyAndAmount = Field(alias="OthrOprgRvn")
    oprg_expnss: ActiveCurrencyAndAmount = Field(alias="OprgExpnss")
    oprg_prft_or_loss: AmountAndDirection102 = Field(alias="OprgPrftOrLoss")
    net_intrst_incm: ActiveCurrencyAndAmount = Field(alias="NetIntrstIncm")
    othr_non_oprg_rvn: ActiveCurrencyAndAmount = Field(alias="OthrNonOprgRvn")
    non_oprg_expnss: ActiveCurrencyAndAmount = Field(alias="NonOprgExpnss")
    pre_tax_prft_or_loss: AmountAndDirection102 = Field(alias="PreTaxPrftOrLoss")
    pst_tax_prft_or_loss: AmountAndDirection102 = Field(alias="PstTaxPrftOrLoss")


@message("auth.059.001.01", "CCPIncmStmtAndCptlAdqcyRpt")
class CCPIncomeStatementAndCapitalAdequacyReportV01(ISOModel):
    """Message root of auth.059.001.01, carried in the <CCPIncmStmtAndCptlAdqcyRpt> element."""

    incm_stmt: IncomeStatement1 = Field(alias="IncmStmt")
    cptl_rqrmnts: CapitalRequirement1 = Field(alias="CptlRqrmnts")
    ttl_cptl: ActiveCurrencyAndAmount = Field(alias="TtlCptl")
    lqd_fin_rsrcs: ActiveCurrencyAndAmount = Field(alias="LqdFinRsrcs")
    hpthtcl_cptl_measr: list[HypotheticalCapitalMeasure1] = Field(alias="HpthtclCptlMeasr")
    splmtry_data: list[SupplementaryData1] | None = Field(None, alias="SplmtryData")
