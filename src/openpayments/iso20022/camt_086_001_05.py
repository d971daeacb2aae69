"""
camt.086.001.05 - BankServicesBillingStatementV05

Bank services billing statement, sent by a financial institution to report the charges and taxes
for the services it provided.

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
    AccountIdentification4Choice,
    ActiveOrHistoricCurrencyAndAmount,
    ActiveOrHistoricCurrencyCode,
    BankTransactionCodeStructure4,
    BICFIDec2014Identifier,
    BranchAndFinancialInstitutionIdentification8,
    CashAccount40,
    ClearingSystemMemberIdentification2,
    Contact13,
    CountryCode,
    GenericFinancialIdentification1,
    ISODate,
    ISODateTime,
    LEIIdentifier,
    Max105Text,
    Max10Text,
    Max140Text,
    Max35Text,
    Max6Text,
    Max70Text,
    OrganisationIdentification39,
    Pagination1,
    PostalAddress27,
)


class AccountLevel1Code(str, Enum):
    INTM = "INTM"
    SMRY = "SMRY"


class AccountLevel2Code(str, Enum):
    INTM = "INTM"
    SMRY = "SMRY"
    DETL = "DETL"


class BillingTaxCalculationMethod1Code(str, Enum):
    NTAX = "NTAX"
    MTDA = "MTDA"
    MTDB = "MTDB"
    MTDC = "MTDC"
    MTDD = "MTDD"
    UDFD = "UDFD"


class Max40Text(SimpleText):
    min_length = 1
    max_length = 40


class ResidenceLocation1Choice(ChoiceModel):
    ctry: CountryCode | None = Field(None, alias="Ctry")
    area: Max35Text | None = Field(None, alias="Area")


class AccountTax1(ISOModel):
    clctn_mtd: BillingTaxCalculationMethod1Code = Field(alias="ClctnMtd")
    rgn: Max40Text | None = Field(None, alias="Rgn")
    non_res_ctry: ResidenceLocation1Choice | None = Field(None, alias="NonResCtry")


class AmountAndDirection34(ISOModel):
    amt: ActiveOrHistoricCurrencyAndAmount = Field(alias="Amt")
    sgn: bool = Field(alias="Sgn")


class BalanceAdjustmentType1Code(str, Enum):
    LDGR = "LDGR"
    FLOT = "FLOT"
    CLLD = "CLLD"


class BalanceAdjustment1(ISOModel):
    tp: BalanceAdjustmentType1Code = Field(alias="Tp")
    desc: Max105Text = Field(alias="Desc")
    bal_amt: AmountAndDirection34 = Field(alias="BalAmt")
    avrg_amt: AmountAndDirection34 | None = Field(None, alias="AvrgAmt")
    err_dt: ISODate | None = Field(None, alias="ErrDt")
    pstng_dt: ISODate = Field(alias="PstngDt")
    days: Decimal | None = Field(None, alias="Days")
    earngs_adjstmnt_amt: AmountAndDirection34 | None = Field(None, alias="EarngsAdjstmntAmt")


class ReportHeader6(ISOModel):
    rpt_id: Max35Text = Field(alias="RptId")
    msg_pgntn: Pagination1 | None = Field(None, alias="MsgPgntn")


class ExternalBillingBalanceType1Code(SimpleText):
    min_length = 1
    max_length = 4


class BillingBalanceType1Choice(ChoiceModel):
    cd: ExternalBillingBalanceType1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class BillingCurrencyType1Code(str, Enum):
    ACCT = "ACCT"
    STLM = "STLM"
    PRCG = "PRCG"


class BillingBalance1(ISOModel):
    tp: BillingBalanceType1Choice = Field(alias="Tp")
    val: AmountAndDirection34 = Field(alias="Val")
    ccy_tp: BillingCurrencyType1Code | None = Field(None, alias="CcyTp")


class ExternalBillingCompensationType1Code(SimpleText):
    min_length = 1
    max_length = 4


class BillingCompensationType1Choice(ChoiceModel):
    cd: ExternalBillingCompensationType1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class BillingCurrencyType2Code(str, Enum):
    ACCT = "ACCT"
    STLM = "STLM"
    PRCG = "PRCG"
    HOST = "HOST"


class BillingCompensation1(ISOModel):
    tp: BillingCompensationType1Choice = Field(alias="Tp")
    val: AmountAndDirection34 = Field(alias="Val")
    ccy_tp: BillingCurrencyType2Code | None = Field(None, alias="CcyTp")


class ExternalBillingRateIdentification1Code(SimpleText):
    min_length = 1
    max_length = 4


class BillingRateIdentification1Choice(ChoiceModel):
    cd: ExternalBillingRateIdentification1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class BillingRate1(ISOModel):
    id: BillingRateIdentification1Choice = Field(alias="Id")
    val: Decimal = Field(alias="Val")
    days_in_prd: Decimal | None = Field(None, alias="DaysInPrd")
    days_in_yr: Decimal | None = Field(None, alias="DaysInYr")


class BillingServicesAmount1(ISOModel):
    hst_amt: AmountAndDirection34 = Field(alias="HstAmt")
    pricg_amt: AmountAndDirection34 | None = Field(None, alias="PricgAmt")


class BillingServicesAmount2(ISOModel):
    hst_amt: AmountAndDirection34 = Field(alias="HstAmt")
    sttlm_amt: AmountAndDirection34 | None = Field(None, alias="SttlmAmt")
    pricg_amt: AmountAndDirection34 | None = Field(None, alias="PricgAmt")


class BillingServicesTax1(ISOModel):
    nb: Max35Text = Field(alias="Nb")
    desc: Max40Text | None = Field(None, alias="Desc")
    rate: Decimal = Field(alias="Rate")
    hst_amt: AmountAndDirection34 = Field(alias="HstAmt")
    pricg_amt: AmountAndDirection34 | None = Field(None, alias="PricgAmt")


class BillingMethod1(ISOModel):
    svc_chrg_hst_amt: AmountAndDirection34 = Field(alias="SvcChrgHstAmt")
    svc_tax: BillingServicesAmount1 = Field(alias="SvcTax")
    ttl_chrg: BillingServicesAmount2 = Field(alias="TtlChrg")
    tax_id: list[BillingServicesTax1] = Field(alias="TaxId")


class BillingMethod2(ISOModel):
    svc_chrg_hst_amt: AmountAndDirection34 = Field(alias="SvcChrgHstAmt")
    svc_tax: BillingServicesAmount1 = Field(alias="SvcTax")
    tax_id: list[BillingServicesTax1] = Field(alias="TaxId")


class BillingServicesTax2(ISOModel):
    nb: Max35Text = Field(alias="Nb")
    desc: Max40Text | None = Field(None, alias="Desc")
    rate: Decimal = Field(alias="Rate")
    pricg_amt: AmountAndDirection34 = Field(alias="PricgAmt")


class BillingMethod3(ISOModel):
    svc_tax_pric_amt: AmountAndDirection34 = Field(alias="SvcTaxPricAmt")
    tax_id: list[BillingServicesTax2] = Field(alias="TaxId")


class BillingMethod1Choice(ChoiceModel):
    mtd_a: BillingMethod1 | None = Field(None, alias="MtdA")
    mtd_b: BillingMethod2 | None = Field(None, alias="MtdB")
    mtd_d: BillingMethod3 | None = Field(None, alias="MtdD")


class BillingChargeMethod1Code(str, Enum):
    UPRC = "UPRC"
    STAM = "STAM"
    BCHG = "BCHG"
    DPRC = "DPRC"
    FCHG = "FCHG"
    LPRC = "LPRC"
    MCHG = "MCHG"
    MXRD = "MXRD"
    TIR1 = "TIR1"
    TIR2 = "TIR2"
    TIR3 = "TIR3"
    TIR4 = "TIR4"
    TIR5 = "TIR5"
    TIR6 = "TIR6"
    TIR7 = "TIR7"
    TIR8 = "TIR8"
    TIR9 = "TIR9"
    TPRC = "TPRC"
    ZPRC = "ZPRC"
    BBSE = "BBSE"


class Max20Text(SimpleText):
    min_length = 1
    max_length = 20


class BillingPrice1(ISOModel):
    ccy: ActiveOrHistoricCurrencyCode | None = Field(None, alias="Ccy")
    unit_pric: AmountAndDirection34 | None = Field(None, alias="UnitPric")
    mtd: BillingChargeMethod1Code | None = Field(None, alias="Mtd")
    rule: Max20Text | None = Field(None, alias="Rule")


class Max8Text(SimpleText):
    min_length = 1
    max_length = 8


class BillingServiceCommonIdentification1(ISOModel):
    issr: Max6Text = Field(alias="Issr")
    id: Max8Text = Field(alias="Id")


class BillingSubServiceQualifier1Code(str, Enum):
    LBOX = "LBOX"
    STOR = "STOR"
    BILA = "BILA"
    SEQN = "SEQN"
    MACT = "MACT"


class BillingSubServiceQualifier1Choice(ChoiceModel):
    cd: BillingSubServiceQualifier1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class BillingSubServiceIdentification1(ISOModel):
    issr: BillingSubServiceQualifier1Choice = Field(alias="Issr")
    id: Max35Text = Field(alias="Id")


class Max12Text(SimpleText):
    min_length = 1
    max_length = 12


class BillingServiceIdentification3(ISOModel):
    id: Max35Text = Field(alias="Id")
    sub_svc: BillingSubServiceIdentification1 | None = Field(None, alias="SubSvc")
    desc: Max70Text = Field(alias="Desc")
    cmon_cd: BillingServiceCommonIdentification1 | None = Field(None, alias="CmonCd")
    bk_tx_cd: BankTransactionCodeStructure4 | None = Field(None, alias="BkTxCd")
    svc_tp: Max12Text | None = Field(None, alias="SvcTp")


class BillingServiceParameters3(ISOModel):
    bk_svc: BillingServiceIdentification3 = Field(alias="BkSvc")
    vol: Decimal | None = Field(None, alias="Vol")


class ServicePaymentMethod1Code(str, Enum):
    BCMP = "BCMP"
    FLAT = "FLAT"
    PVCH = "PVCH"
    INVS = "INVS"
    WVED = "WVED"
    FREE = "FREE"


class ServiceTaxDesignation1Code(str, Enum):
    XMPT = "XMPT"
    ZERO = "ZERO"
    TAXE = "TAXE"


class TaxReason1(ISOModel):
    cd: Max10Text = Field(alias="Cd")
    expltn: Max105Text = Field(alias="Expltn")


class ServiceTaxDesignation1(ISOModel):
    cd: ServiceTaxDesignation1Code = Field(alias="Cd")
    rgn: Max35Text | None = Field(None, alias="Rgn")
    tax_rsn: list[TaxReason1] | None = Field(None, alias="TaxRsn")


class BillingService2(ISOModel):
    svc_dtl: BillingServiceParameters3 = Field(alias="SvcDtl")
    pric: BillingPrice1 | None = Field(None, alias="Pric")
    pmt_mtd: ServicePaymentMethod1Code = Field(alias="PmtMtd")
    orgnl_chrg_pric: AmountAndDirection34 = Field(alias="OrgnlChrgPric")
    orgnl_chrg_sttlm_amt: AmountAndDirection34 | None = Field(None, alias="OrgnlChrgSttlmAmt")
    bal_reqrd_acct_amt: AmountAndDirection34 | None = Field(None, alias="BalReqrdAcctAmt")
    tax_dsgnt: ServiceTaxDesignation1 = Field(alias="TaxDsgnt")
    tax_clctn: BillingMethod1Choice | None = Field(None, alias="TaxClctn")


class ServiceAdjustmentType1Code(str, Enum):
    COMP = "COMP"
    NCMP = "NCMP"


class BillingServiceAdjustment1(ISOModel):
    tp: ServiceAdjustmentType1Code = Field(alias="Tp")
    desc: Max140Text = Field(alias="Desc")
    amt: AmountAndDirection34 = Field(alias="Amt")
    bal_reqrd_amt: AmountAndDirection34 | None = Field(None, alias="BalReqrdAmt")
    err_dt: ISODate | None = Field(None, alias="ErrDt")
    adjstmnt_id: Max35Text | None = Field(None, alias="AdjstmntId")
    sub_svc: BillingSubServiceIdentification1 | None = Field(None, alias="SubSvc")
    pric_chng: AmountAndDirection34 | None = Field(None, alias="PricChng")
    orgnl_pric: AmountAndDirection34 | None = Field(None, alias="OrgnlPric")
    new_pric: AmountAndDirection34 | None = Field(None, alias="NewPric")
    vol_chng: Decimal | None = Field(None, alias="VolChng")
    orgnl_vol: Decimal | None = Field(None, alias="OrgnlVol")
    new_vol: Decimal | None = Field(None, alias="NewVol")
    orgnl_chrg_amt: AmountAndDirection34 | None = Field(None, alias="OrgnlChrgAmt")
    new_chrg_amt: AmountAndDirection34 | None = Field(None, alias="NewChrgAmt")


class BillingStatementStatus1Code(str, Enum):
    ORGN = "ORGN"
    RPLC = "RPLC"
    TEST = "TEST"


class BillingServiceIdentification2(ISOModel):
    id: Max35Text = Field(alias="Id")
    sub_svc: BillingSubServiceIdentification1 | None = Field(None, alias="SubSvc")
    desc: Max70Text = Field(alias="Desc")


class BillingServiceParameters2(ISOModel):
    bk_svc: BillingServiceIdentification2 = Field(alias="BkSvc")
    vol: Decimal | None = Field(None, alias="Vol")
    unit_pric: AmountAndDirection34 | None = Field(None, alias="UnitPric")
    svc_chrg_amt: AmountAndDirection34 = Field(alias="SvcChrgAmt")


class BillingServicesAmount3(ISOModel):
    src_amt: AmountAndDirection34 = Field(alias="SrcAmt")
    hst_amt: AmountAndDirection34 = Field(alias="HstAmt")


class BillingServicesTax3(ISOModel):
    nb: Max35Text = Field(alias="Nb")
    desc: Max40Text | None = Field(None, alias="Desc")
    rate: Decimal = Field(alias="Rate")
    ttl_tax_amt: AmountAndDirection34 = Field(alias="TtlTaxAmt")


class TaxCalculation1(ISOModel):
    hst_ccy: ActiveOrHistoricCurrencyCode = Field(alias="HstCcy")
    taxbl_svc_chrg_convs: list[BillingServicesAmount3] = Field(alias="TaxblSvcChrgConvs")
    ttl_taxbl_svc_chrg_hst_amt: AmountAndDirection34 = Field(alias="TtlTaxblSvcChrgHstAmt")
    tax_id: list[BillingServicesTax3] = Field(alias="TaxId")
    ttl_tax: AmountAndDirection34 = Field(alias="TtlTax")


class BillingMethod4(ISOModel):
    svc_dtl: list[BillingServiceParameters2] = Field(alias="SvcDtl")
    tax_clctn: TaxCalculation1 = Field(alias="TaxClctn")


class BillingTaxIdentification3(ISOModel):
    vat_regn_nb: Max35Text | None = Field(None, alias="VATRegnNb")
    tax_regn_nb: Max35Text | None = Field(None, alias="TaxRegnNb")
    tax_ctct: Contact13 | None = Field(None, alias="TaxCtct")


class BillingTaxRegion3(ISOModel):
    rgn_nb: Max40Text = Field(alias="RgnNb")
    rgn_nm: Max40Text = Field(alias="RgnNm")
    cstmr_tax_id: Max40Text = Field(alias="CstmrTaxId")
    pt_dt: ISODate | None = Field(None, alias="PtDt")
    sndg_fi: BillingTaxIdentification3 | None = Field(None, alias="SndgFI")
    invc_nb: Max40Text | None = Field(None, alias="InvcNb")
    mtd_c: BillingMethod4 | None = Field(None, alias="MtdC")
    sttlm_amt: AmountAndDirection34 = Field(alias="SttlmAmt")
    tax_due_to_rgn: AmountAndDirection34 = Field(alias="TaxDueToRgn")


class CompensationMethod1Code(str, Enum):
    NOCP = "NOCP"
    DBTD = "DBTD"
    INVD = "INVD"
    DDBT = "DDBT"


class ParentCashAccount5(ISOModel):
    lvl: AccountLevel1Code | None = Field(None, alias="Lvl")
    id: CashAccount40 = Field(alias="Id")
    svcr: BranchAndFinancialInstitutionIdentification8 | None = Field(None, alias="Svcr")


class CashAccountCharacteristics5(ISOModel):
    acct_lvl: AccountLevel2Code = Field(alias="AcctLvl")
    csh_acct: CashAccount40 = Field(alias="CshAcct")
    acct_svcr: BranchAndFinancialInstitutionIdentification8 | None = Field(None, alias="AcctSvcr")
    prnt_acct: ParentCashAccount5 | None = Field(None, alias="PrntAcct")
    compstn_mtd: CompensationMethod1Code = Field(alias="CompstnMtd")
    dbt_acct: AccountIdentification4Choice | None = Field(None, alias="DbtAcct")
    delyd_dbt_dt: ISODate | None = Field(None, alias="DelydDbtDt")
    sttlm_advc: Max105Text | None = Field(None, alias="SttlmAdvc")
    acct_bal_ccy_cd: ActiveOrHistoricCurrencyCode = Field(alias="AcctBalCcyCd")
    sttlm_ccy_cd: ActiveOrHistoricCurrencyCode | None = Field(None, alias="SttlmCcyCd")
    hst_ccy_cd: ActiveOrHistoricCurrencyCode | None = Field(None, alias="HstCcyCd")
    tax: AccountTax1 | None = Field(None, alias="Tax")
    acct_svcr_ctct: Contact13 = Field(alias="AcctSvcrCtct")


class CurrencyExchange6(ISOModel):
    src_ccy: ActiveOrHistoricCurrencyCode = Field(alias="SrcCcy")
    trgt_ccy: ActiveOrHistoricCurrencyCode = Field(alias="TrgtCcy")
    xchg_rate: Decimal = Field(alias="XchgRate")
    desc: Max40Text | None = Field(None, alias="Desc")
    unit_ccy: ActiveOrHistoricCurrencyCode | None = Field(None, alias="UnitCcy")
    cmnts: Max70Text | None = Field(None, alias="Cmnts")
    qtn_dt: ISODate | None = Field(None, alias="QtnDt")


class DatePeriod1(ISOModel):
    fr_dt: ISODate | None = Field(None, alias="FrDt")
    to_dt: ISODate = Field(alias="ToDt")


class BillingStatement5(ISOModel):
    stmt_id: Max35Text = Field(alias="StmtId")
    fr_to_dt: DatePeriod1 = Field(alias="FrToDt")
    cre_dt_tm: ISODateTime = Field(alias="CreDtTm")
    sts: BillingStatementStatus1Code = Field(alias="Sts")
    acct_chrtcs: CashAccountCharacteristics5 = Field(alias="AcctChrtcs")
    rate_data: list[BillingRate1] | None = Field(None, alias="RateData")
    ccy_xchg: list[CurrencyExchange6] | None = Field(None, alias="CcyXchg")
    bal: list[BillingBalance1] | None = Field(None, alias="Bal")
    compstn: list[BillingCompensation1] | None = Field(None, alias="Compstn")
    svc: list[BillingService2] | None = Field(None, alias="Svc")
    tax_rgn: list[BillingTaxRegion3] | None = Field(None, alias="TaxRgn")
    bal_adjstmnt: list[BalanceAdjustment1] | None = Field(None, alias="BalAdjstmnt")
    svc_adjstmnt: list[BillingServiceAdjustment1] | None = Field(None, alias="SvcAdjstmnt")


class FinancialInstitutionIdentification19(ISOModel):
    bicfi: BICFIDec2014Identifier | None = Field(None, alias="BICFI")
    clr_sys_mmb_id: ClearingSystemMemberIdentification2 | None = Field(None, alias="ClrSysMmbId")
    lei: LEIIdentifier | None = Field(None, alias="LEI")
    othr: GenericFinancialIdentification1 | None = Field(None, alias="Othr")


class Party56Choice(ChoiceModel):
    org_id: OrganisationIdentification39 | None = Field(None, alias="OrgId")
    fi_id: FinancialInstitutionIdentification19 | None = Field(None, alias="FIId")


class PartyIdentification273(ISOModel):
    nm: Max140Text = Field(alias="Nm")
    lgl_nm: Max140Text | None = Field(None, alias="LglNm")
    pstl_adr: PostalAddress27 | None = Field(None, alias="PstlAdr")
    id: Party56Choice = Field(alias="Id")
    ctry_of_res: CountryCode | None = Field(None, alias="CtryOfRes")
    ctct_dtls: Contact13 | None = Field(None, alias="CtctDtls")


class StatementGroup5(ISOModel):
    grp_id: Max35Text = Field(alias="GrpId")
    sndr: PartyIdentification273 = Field(alias="Sndr")
    sndr_indv_ctct: list[Contact13] | None = Field(None, alias="SndrIndvCtct")
    rcvr: PartyIdentification273 = Field(alias="Rcvr")
    rcvr_indv_ctct: list[Contact13] | None = Field(None, alias="RcvrIndvCtct")
    bllg_stmt: list[BillingStatement5] = Field(alias="BllgStmt")


@message("camt.086.001.05", "BkSvcsBllgStmt")
class BankServicesBillingStatementV05(ISOModel):
    """Message root of camt.086.001.05, carried in the <BkSvcsBllgStmt> element."""

    rpt_hdr: ReportHeader6 = Field(alias="RptHdr")
    bllg_stmt_grp: list[StatementGroup5] = Field(alias="BllgStmtGrp")
