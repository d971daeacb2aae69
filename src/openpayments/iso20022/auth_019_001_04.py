"""
auth.019.001.04 - ContractRegistrationConfirmationV04

Contract registration confirmation, sent by the registration agent to confirm the registration of
a currency control contract.

Only the types specific to this message are declared here; shared types come from
openpayments.iso20022.common.
"""

from decimal import Decimal
from enum import Enum

from pydantic import ConfigDict, Field

from openpayments.domain.models import ChoiceModel, ISOModel
from openpayments.domain.registry import message
from openpayments.domain.types import SimpleText
from openpayments.iso20022.common import (
    AccountIdentification4Choice,
    ActiveCurrencyAndAmount,
    ActiveCurrencyCode,
    ActiveOrHistoricCurrencyCode,
    BranchAndFinancialInstitutionIdentification8,
    Exact1NumericText,
    ExchangeRateType1Code,
    ExternalDocumentType1Code,
    ISINOct2015Identifier,
    ISODate,
    ISODateTime,
    Max1025Text,
    Max140Text,
    Max15NumericText,
    Max256Text,
    Max35Text,
    PartyIdentification272,
    RateBasis1Code,
    SupplementaryData1,
)


class BenchmarkCurveName2Code(str, Enum):
    WIBO = "WIBO"
    TREA = "TREA"
    TIBO = "TIBO"
    TLBO = "TLBO"
    SWAP = "SWAP"
    STBO = "STBO"
    PRBO = "PRBO"
    PFAN = "PFAN"
    NIBO = "NIBO"
    MAAA = "MAAA"
    MOSP = "MOSP"
    LIBO = "LIBO"
    LIBI = "LIBI"
    JIBA = "JIBA"
    ISDA = "ISDA"
    GCFR = "GCFR"
    FUSW = "FUSW"
    EUCH = "EUCH"
    EUUS = "EUUS"
    EURI = "EURI"
    EONS = "EONS"
    EONA = "EONA"
    CIBO = "CIBO"
    CDOR = "CDOR"
    BUBO = "BUBO"
    BBSW = "BBSW"


class Max25Text(SimpleText):
    min_length = 1
    max_length = 25


class BenchmarkCurveName4Choice(ChoiceModel):
    isin: ISINOct2015Identifier | None = Field(None, alias="ISIN")
    indx: BenchmarkCurveName2Code | None = Field(None, alias="Indx")
    nm: Max25Text | None = Field(None, alias="Nm")


class Max100KBinary(SimpleText):
    min_length = 1
    max_length = 102400


class BinaryFile1(ISOModel):
    mime_tp: Max35Text | None = Field(None, alias="MIMETp")
    ncodg_tp: Max35Text | None = Field(None, alias="NcodgTp")
    char_set: Max35Text | None = Field(None, alias="CharSet")
    incl_binry_objct: Max100KBinary | None = Field(None, alias="InclBinryObjct")


class DepositType1Code(str, Enum):
    FITE = "FITE"
    CALL = "CALL"


class CashCollateral5(ISOModel):
    coll_id: Max35Text | None = Field(None, alias="CollId")
    csh_acct_id: AccountIdentification4Choice | None = Field(None, alias="CshAcctId")
    asst_nb: Max35Text | None = Field(None, alias="AsstNb")
    dpst_amt: ActiveCurrencyAndAmount | None = Field(None, alias="DpstAmt")
    dpst_tp: DepositType1Code | None = Field(None, alias="DpstTp")
    mtrty_dt: ISODate | None = Field(None, alias="MtrtyDt")
    val_dt: ISODate | None = Field(None, alias="ValDt")
    xchg_rate: Decimal | None = Field(None, alias="XchgRate")
    coll_val: ActiveCurrencyAndAmount = Field(alias="CollVal")
    hrcut: Decimal | None = Field(None, alias="Hrcut")


class CommunicationMethod4Code(str, Enum):
    EMAL = "EMAL"
    FAXI = "FAXI"
    FILE = "FILE"
    ONLI = "ONLI"
    PHON = "PHON"
    POST = "POST"
    PROP = "PROP"
    SWMT = "SWMT"
    SWMX = "SWMX"


class ExternalContractBalanceType1Code(SimpleText):
    min_length = 1
    max_length = 4


class ContractBalanceType1Choice(ChoiceModel):
    cd: ExternalContractBalanceType1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class CreditDebit3Code(str, Enum):
    CRDT = "CRDT"
    DBIT = "DBIT"


class ContractBalance1(ISOModel):
    tp: ContractBalanceType1Choice = Field(alias="Tp")
    amt: ActiveCurrencyAndAmount = Field(alias="Amt")
    cdt_dbt_ind: CreditDebit3Code = Field(alias="CdtDbtInd")


class ExternalContractClosureReason1Code(SimpleText):
    min_length = 1
    max_length = 4


class ContractClosureReason1Choice(ChoiceModel):
    cd: ExternalContractClosureReason1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class ContractCollateral1(ISOModel):
    ttl_amt: ActiveCurrencyAndAmount = Field(alias="TtlAmt")
    coll_desc: list[CashCollateral5] | None = Field(None, alias="CollDesc")
    addtl_inf: Max1025Text | None = Field(None, alias="AddtlInf")


class CurrencyControlHeader7(ISOModel):
    msg_id: Max35Text = Field(alias="MsgId")
    cre_dt_tm: ISODateTime = Field(alias="CreDtTm")
    nb_of_itms: Max15NumericText = Field(alias="NbOfItms")
    rcvg_pty: PartyIdentification272 = Field(alias="RcvgPty")
    regn_agt: BranchAndFinancialInstitutionIdentification8 = Field(alias="RegnAgt")


class DocumentIdentification22(ISOModel):
    id: Max35Text = Field(alias="Id")
    dt_of_isse: str | None = Field(None, alias="DtOfIsse")


class DocumentIdentification29(ISOModel):
    id: Max35Text = Field(alias="Id")
    dt_of_isse: str = Field(alias="DtOfIsse")


class PaymentScheduleType2Code(str, Enum):
    CNTR = "CNTR"
    ESTM = "ESTM"
    BOTH = "BOTH"


class PaymentScheduleType2Choice(ChoiceModel):
    cd: PaymentScheduleType2Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class DocumentIdentification28(ISOModel):
    id: Max35Text | None = Field(None, alias="Id")
    dt_of_isse: str = Field(alias="DtOfIsse")


class RegisteredContractAmendment1(ISOModel):
    amdmnt_dt: ISODate = Field(alias="AmdmntDt")
    doc: DocumentIdentification28 = Field(alias="Doc")
    start_dt: ISODate | None = Field(None, alias="StartDt")
    amdmnt_rsn: Max35Text | None = Field(None, alias="AmdmntRsn")
    addtl_inf: Max1025Text | None = Field(None, alias="AddtlInf")


class RegisteredContractCommunication1(ISOModel):
    mtd: CommunicationMethod4Code = Field(alias="Mtd")
    dt: ISODate = Field(alias="Dt")


class RegisteredContractJournal3(ISOModel):
    regn_agt: BranchAndFinancialInstitutionIdentification8 = Field(alias="RegnAgt")
    unq_id: DocumentIdentification28 | None = Field(None, alias="UnqId")
    clsr_dt: ISODate = Field(alias="ClsrDt")
    clsr_rsn: ContractClosureReason1Choice = Field(alias="ClsrRsn")


class LegalOrganisation2(ISOModel):
    id: Max35Text | None = Field(None, alias="Id")
    nm: Max140Text | None = Field(None, alias="Nm")
    estblishmt_dt: ISODate | None = Field(None, alias="EstblishmtDt")
    regn_dt: ISODate | None = Field(None, alias="RegnDt")


class TaxExemptReason1Code(str, Enum):
    NONE = "NONE"
    MASA = "MASA"
    MISA = "MISA"
    SISA = "SISA"
    IISA = "IISA"
    CUYP = "CUYP"
    PRYP = "PRYP"
    ASTR = "ASTR"
    EMPY = "EMPY"
    EMCY = "EMCY"
    EPRY = "EPRY"
    ECYE = "ECYE"
    NFPI = "NFPI"
    NFQP = "NFQP"
    DECP = "DECP"
    IRAC = "IRAC"
    IRAR = "IRAR"
    KEOG = "KEOG"
    PFSP = "PFSP"
    CODE_401K = "401K"
    SIRA = "SIRA"
    CODE_403B = "403B"
    CODE_457X = "457X"
    RIRA = "RIRA"
    RIAN = "RIAN"
    RCRF = "RCRF"
    RCIP = "RCIP"
    EIFP = "EIFP"
    EIOP = "EIOP"


class TaxExemptionReasonFormat1Choice(ChoiceModel):
    ustrd: Max140Text | None = Field(None, alias="Ustrd")
    strd: TaxExemptReason1Code | None = Field(None, alias="Strd")


class TaxParty4(ISOModel):
    tax_id: Max35Text | None = Field(None, alias="TaxId")
    tax_tp: Max35Text | None = Field(None, alias="TaxTp")
    regn_id: Max35Text | None = Field(None, alias="RegnId")
    tax_xmptn_rsn: list[TaxExemptionReasonFormat1Choice] | None = Field(None, alias="TaxXmptnRsn")


class TradeParty6(ISOModel):
    pty_id: PartyIdentification272 = Field(alias="PtyId")
    lgl_org: LegalOrganisation2 | None = Field(None, alias="LglOrg")
    tax_pty: list[TaxParty4] | None = Field(None, alias="TaxPty")


class SignatureEnvelopeReference(ISOModel):
    """Extension point; any content is accepted and not interpreted."""

    model_config = ConfigDict(extra="allow")


class DocumentGeneralInformation5(ISOModel):
    doc_tp: ExternalDocumentType1Code = Field(alias="DocTp")
    doc_nb: Max35Text = Field(alias="DocNb")
    doc_nm: Max140Text | None = Field(None, alias="DocNm")
    sndr_rcvr_seq_id: Max140Text | None = Field(None, alias="SndrRcvrSeqId")
    isse_dt: ISODate | None = Field(None, alias="IsseDt")
    url: Max256Text | None = Field(None, alias="URL")
    lk_file_hash: SignatureEnvelopeReference | None = Field(None, alias="LkFileHash")
    attchd_binry_file: BinaryFile1 = Field(alias="AttchdBinryFile")


class InterestPaymentSchedule1(ISOModel):
    intrst_schdl_id: Max35Text | None = Field(None, alias="IntrstSchdlId")
    amt: ActiveCurrencyAndAmount | None = Field(None, alias="Amt")
    xpctd_dt: ISODate | None = Field(None, alias="XpctdDt")
    due_dt: ISODate | None = Field(None, alias="DueDt")
    addtl_inf: Max1025Text | None = Field(None, alias="AddtlInf")


class InterestRateContractTerm1(ISOModel):
    unit: RateBasis1Code = Field(alias="Unit")
    val: Decimal = Field(alias="Val")


class FloatingInterestRate4(ISOModel):
    ref_rate: BenchmarkCurveName4Choice = Field(alias="RefRate")
    term: InterestRateContractTerm1 = Field(alias="Term")
    bsis_pt_sprd: Decimal = Field(alias="BsisPtSprd")


class InterestRate2Choice(ChoiceModel):
    fxd: Decimal | None = Field(None, alias="Fxd")
    fltg: FloatingInterestRate4 | None = Field(None, alias="Fltg")


class LoanContractTranche1(ISOModel):
    trch_nb: Decimal = Field(alias="TrchNb")
    xpctd_dt: ISODate = Field(alias="XpctdDt")
    amt: ActiveCurrencyAndAmount = Field(alias="Amt")
    due_dt: ISODate | None = Field(None, alias="DueDt")
    drtn_cd: Exact1NumericText | None = Field(None, alias="DrtnCd")
    last_trch_ind: bool | None = Field(None, alias="LastTrchInd")


class PaymentSchedule1(ISOModel):
    pmt_schdl_id: Max35Text | None = Field(None, alias="PmtSchdlId")
    amt: ActiveCurrencyAndAmount | None = Field(None, alias="Amt")
    xpctd_dt: ISODate | None = Field(None, alias="XpctdDt")
    due_dt: ISODate | None = Field(None, alias="DueDt")
    addtl_inf: Max1025Text | None = Field(None, alias="AddtlInf")


class SpecialCondition1(ISOModel):
    incmg_amt: ActiveCurrencyAndAmount = Field(alias="IncmgAmt")
    outgng_amt: ActiveCurrencyAndAmount = Field(alias="OutgngAmt")
    incmg_amt_to_othr_acct: ActiveCurrencyAndAmount | None = Field(
        None, alias="IncmgAmtToOthrAcct"
    )
    pmt_fr_othr_acct: ActiveCurrencyAndAmount | None = Field(None, alias="PmtFrOthrAcct")


class ExchangeRate1(ISOModel):
    unit_ccy: ActiveOrHistoricCurrencyCode | None = Field(None, alias="UnitCcy")
    xchg_rate: Decimal | None = Field(None, alias="XchgRate")
    rate_tp: ExchangeRateType1Code | None = Field(None, alias="RateTp")
    ctrct_id: Max35Text | None = Field(None, alias="CtrctId")


class SyndicatedLoan3(ISOModel):
    brrwr: TradeParty6 = Field(alias="Brrwr")
    lndr: TradeParty6 | None = Field(None, alias="Lndr")
    amt: ActiveCurrencyAndAmount | None = Field(None, alias="Amt")
    shr: Decimal | None = Field(None, alias="Shr")
    xchg_rate_inf: ExchangeRate1 | None = Field(None, alias="XchgRateInf")


class LoanContract4(ISOModel):
    ctrct_doc_id: DocumentIdentification22 = Field(alias="CtrctDocId")
    ln_tp_id: Max35Text | None = Field(None, alias="LnTpId")
    buyr: list[TradeParty6] = Field(alias="Buyr")
    sellr: list[TradeParty6] = Field(alias="Sellr")
    amt: ActiveCurrencyAndAmount | None = Field(None, alias="Amt")
    mtrty_dt: ISODate | None = Field(None, alias="MtrtyDt")
    prlngtn_flg: bool | None = Field(None, alias="PrlngtnFlg")
    start_dt: ISODate | None = Field(None, alias="StartDt")
    sttlm_ccy: ActiveCurrencyCode | None = Field(None, alias="SttlmCcy")
    spcl_conds: SpecialCondition1 | None = Field(None, alias="SpclConds")
    drtn_cd: Exact1NumericText | None = Field(None, alias="DrtnCd")
    intrst_rate: InterestRate2Choice | None = Field(None, alias="IntrstRate")
    trch: list[LoanContractTranche1] | None = Field(None, alias="Trch")
    pmt_schdl: list[PaymentSchedule1] | None = Field(None, alias="PmtSchdl")
    intrst_schdl: list[InterestPaymentSchedule1] | None = Field(None, alias="IntrstSchdl")
    intra_cpny_ln: bool = Field(alias="IntraCpnyLn")
    coll: ContractCollateral1 | None = Field(None, alias="Coll")
    sndctd_ln: list[SyndicatedLoan3] | None = Field(None, alias="SndctdLn")
    attchmnt: list[DocumentGeneralInformation5] | None = Field(None, alias="Attchmnt")


class InterestPaymentDateRange1(ISOModel):
    intrst_schdl_id: Max35Text | None = Field(None, alias="IntrstSchdlId")
    xpctd_dt: ISODate | None = Field(None, alias="XpctdDt")
    due_dt: ISODate | None = Field(None, alias="DueDt")


class ShipmentDateRange1(ISOModel):
    earlst_shipmnt_dt: ISODate | None = Field(None, alias="EarlstShipmntDt")
    latst_shipmnt_dt: ISODate | None = Field(None, alias="LatstShipmntDt")


class ShipmentDateRange2(ISOModel):
    sub_qty_val: Decimal = Field(alias="SubQtyVal")
    earlst_shipmnt_dt: ISODate | None = Field(None, alias="EarlstShipmntDt")
    latst_shipmnt_dt: ISODate | None = Field(None, alias="LatstShipmntDt")


class ShipmentSchedule2Choice(ChoiceModel):
    shipmnt_dt_rg: ShipmentDateRange1 | None = Field(None, alias="ShipmntDtRg")
    shipmnt_sub_schdl: list[ShipmentDateRange2] | None = Field(None, alias="ShipmntSubSchdl")


class TradeContract4(ISOModel):
    ctrct_doc_id: DocumentIdentification22 | None = Field(None, alias="CtrctDocId")
    trad_tp_id: Max35Text | None = Field(None, alias="TradTpId")
    amt: ActiveCurrencyAndAmount | None = Field(None, alias="Amt")
    buyr: list[TradeParty6] = Field(alias="Buyr")
    sellr: list[TradeParty6] = Field(alias="Sellr")
    mtrty_dt: ISODate | None = Field(None, alias="MtrtyDt")
    prlngtn_flg: bool | None = Field(None, alias="PrlngtnFlg")
    start_dt: ISODate | None = Field(None, alias="StartDt")
    sttlm_ccy: ActiveCurrencyCode | None = Field(None, alias="SttlmCcy")
    xchg_rate_inf: ExchangeRate1 | None = Field(None, alias="XchgRateInf")
    pmt_schdl: InterestPaymentDateRange1 | None = Field(None, alias="PmtSchdl")
    shipmnt_schdl: ShipmentSchedule2Choice | None = Field(None, alias="ShipmntSchdl")
    attchmnt: list[DocumentGeneralInformation5] | None = Field(None, alias="Attchmnt")


class UnderlyingContract4Choice(ChoiceModel):
    ln: LoanContract4 | None = Field(None, alias="Ln")
    trad: TradeContract4 | None = Field(None, alias="Trad")


class RegisteredContract20(ISOModel):
    orgnl_ctrct_regn_req: Max35Text | None = Field(None, alias="OrgnlCtrctRegnReq")
    rptg_pty: TradeParty6 = Field(alias="RptgPty")
    regn_agt: BranchAndFinancialInstitutionIdentification8 = Field(alias="RegnAgt")
    issr_fi: BranchAndFinancialInstitutionIdentification8 = Field(alias="IssrFI")
    ctrct: UnderlyingContract4Choice = Field(alias="Ctrct")
    ctrct_bal: list[ContractBalance1] | None = Field(None, alias="CtrctBal")
    pmt_schdl_tp: PaymentScheduleType2Choice | None = Field(None, alias="PmtSchdlTp")
    regd_ctrct_id: DocumentIdentification29 = Field(alias="RegdCtrctId")
    prvs_regd_ctrct_id: DocumentIdentification22 | None = Field(None, alias="PrvsRegdCtrctId")
    regd_ctrct_jrnl: list[RegisteredContractJournal3] | None = Field(None, alias="RegdCtrctJrnl")
    amdmnt: list[RegisteredContractAmendment1] | None = Field(None, alias="Amdmnt")
    submissn: RegisteredContractCommunication1 = Field(alias="Submissn")
    dlvry: RegisteredContractCommunication1 = Field(alias="Dlvry")
    ln_prncpl_amt: ActiveCurrencyAndAmount | None = Field(None, alias="LnPrncplAmt")
    estmtd_dt_ind: bool = Field(alias="EstmtdDtInd")
    intr_cpny_ln: bool = Field(alias="IntrCpnyLn")
    addtl_inf: Max1025Text | None = Field(None, alias="AddtlInf")
    splmtry_data: list[SupplementaryData1] | None = Field(None, alias="SplmtryData")


@message("auth.019.001.04", "CtrctRegnConf")
class ContractRegistrationConfirmationV04(ISOModel):
    """Message root of auth.019.001.04, carried in the <CtrctRegnConf> element."""

    grp_hdr: CurrencyControlHeader7 = Field(alias="GrpHdr")
    regd_ctrct: list[RegisteredContract20] = Field(alias="RegdCtrct")
    splmtry_data: list[SupplementaryData1] | None = Field(None, alias="SplmtryData")
