"""
camt.111.001.01 - InvestigationResponseV01

Investigation response, sent by a party that received an investigation request to report the
outcome of the investigation.

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
    ActiveOrHistoricCurrencyAndAmount,
    ActiveOrHistoricCurrencyCode,
    AnyBICDec2014Identifier,
    BICFIDec2014Identifier,
    BranchAndFinancialInstitutionIdentification6,
    CashAccount40,
    Charges6,
    ClearingChannel2Code,
    CreditDebitCode,
    CreditorReferenceInformation2,
    DateAndDateTime2Choice,
    DatePeriod2,
    ExternalDocumentType1Code,
    Garnishment3,
    GenericIdentification1,
    ISODate,
    ISODateTime,
    LocalInstrument2Choice,
    Max1025Text,
    Max105Text,
    Max10KBinary,
    Max140Text,
    Max2048Text,
    Max35Text,
    Max4Text,
    Max500Text,
    Max52Text,
    Max70Text,
    NameAndAddress16,
    Party40Choice,
    PartyIdentification135,
    Priority2Code,
    Purpose2Choice,
    ReferredDocumentInformation7,
    RemittanceAmount2,
    RemittanceLocation7,
    SkipPayload,
    StructuredRemittanceInformation16,
    SupplementaryData1,
    TaxParty1,
    TaxParty2,
    TaxPeriod3,
    TransactionReferences6,
    UUIDv4Identifier,
)


class DatePeriod5(ISOModel):
    cur_val_dt: ISODate = Field(alias="CurValDt")
    reqd_val_dt: ISODate = Field(alias="ReqdValDt")


class AdjustmentCompensation1(ISOModel):
    initl_amt: ActiveCurrencyAndAmount | None = Field(None, alias="InitlAmt")
    due_chrgs: ActiveCurrencyAndAmount | None = Field(None, alias="DueChrgs")
    amt_due: ActiveCurrencyAndAmount = Field(alias="AmtDue")
    compstn_agt: BranchAndFinancialInstitutionIdentification6 | None = Field(
        None, alias="CompstnAgt"
    )
    compstn_acct: CashAccount40 | None = Field(None, alias="CompstnAcct")
    prd: DatePeriod5 | None = Field(None, alias="Prd")
    intrst_rate: Decimal | None = Field(None, alias="IntrstRate")
    rsn: Max140Text | None = Field(None, alias="Rsn")


class Exact2NumericText(SimpleText):
    pattern = r"[0-9]{2}"


class Frequency6Code(str, Enum):
    YEAR = "YEAR"
    MNTH = "MNTH"
    QURT = "QURT"
    MIAN = "MIAN"
    WEEK = "WEEK"
    DAIL = "DAIL"
    ADHO = "ADHO"
    INDA = "INDA"
    FRTN = "FRTN"


class FrequencyAndMoment1(ISOModel):
    tp: Frequency6Code = Field(alias="Tp")
    pt_in_tm: Exact2NumericText = Field(alias="PtInTm")


class FrequencyPeriod1(ISOModel):
    tp: Frequency6Code = Field(alias="Tp")
    cnt_per_prd: Decimal = Field(alias="CntPerPrd")


class Frequency36Choice(ChoiceModel):
    tp: Frequency6Code | None = Field(None, alias="Tp")
    prd: FrequencyPeriod1 | None = Field(None, alias="Prd")
    pt_in_tm: FrequencyAndMoment1 | None = Field(None, alias="PtInTm")


class ExternalMandateSetupReason1Code(SimpleText):
    min_length = 1
    max_length = 4


class MandateSetupReason1Choice(ChoiceModel):
    cd: ExternalMandateSetupReason1Code | None = Field(None, alias="Cd")
    prtry: Max70Text | None = Field(None, alias="Prtry")


class AmendmentInformationDetails14(ISOModel):
    orgnl_mndt_id: Max35Text | None = Field(None, alias="OrgnlMndtId")
    orgnl_cdtr_schme_id: PartyIdentification135 | None = Field(None, alias="OrgnlCdtrSchmeId")
    orgnl_cdtr_agt: BranchAndFinancialInstitutionIdentification6 | None = Field(
        None, alias="OrgnlCdtrAgt"
    )
    orgnl_cdtr_agt_acct: CashAccount40 | None = Field(None, alias="OrgnlCdtrAgtAcct")
    orgnl_dbtr: PartyIdentification135 | None = Field(None, alias="OrgnlDbtr")
    orgnl_dbtr_acct: CashAccount40 | None = Field(None, alias="OrgnlDbtrAcct")
    orgnl_dbtr_agt: BranchAndFinancialInstitutionIdentification6 | None = Field(
        None, alias="OrgnlDbtrAgt"
    )
    orgnl_dbtr_agt_acct: CashAccount40 | None = Field(None, alias="OrgnlDbtrAgtAcct")
    orgnl_fnl_colltn_dt: ISODate | None = Field(None, alias="OrgnlFnlColltnDt")
    orgnl_frqcy: Frequency36Choice | None = Field(None, alias="OrgnlFrqcy")
    orgnl_rsn: MandateSetupReason1Choice | None = Field(None, alias="OrgnlRsn")
    orgnl_trckg_days: Exact2NumericText | None = Field(None, alias="OrgnlTrckgDays")


class EquivalentAmount2(ISOModel):
    amt: ActiveOrHistoricCurrencyAndAmount = Field(alias="Amt")
    ccy_of_trf: ActiveOrHistoricCurrencyCode = Field(alias="CcyOfTrf")


class AmountType4Choice(ChoiceModel):
    instd_amt: ActiveOrHistoricCurrencyAndAmount | None = Field(None, alias="InstdAmt")
    eqvt_amt: EquivalentAmount2 | None = Field(None, alias="EqvtAmt")


class BookingConfirmation1(ISOModel):
    amt: ActiveOrHistoricCurrencyAndAmount = Field(alias="Amt")
    cdt_dbt_ind: CreditDebitCode = Field(alias="CdtDbtInd")
    xchg_rate: Decimal | None = Field(None, alias="XchgRate")
    acct: CashAccount40 = Field(alias="Acct")
    bookg_dt: DateAndDateTime2Choice | None = Field(None, alias="BookgDt")
    val_dt: DateAndDateTime2Choice = Field(alias="ValDt")
    refs: TransactionReferences6 = Field(alias="Refs")
    chrgs: Charges6 | None = Field(None, alias="Chrgs")
    rsn: Max140Text | None = Field(None, alias="Rsn")


class ExternalCategoryPurpose1Code(SimpleText):
    min_length = 1
    max_length = 4


class CategoryPurpose1Choice(ChoiceModel):
    cd: ExternalCategoryPurpose1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class ExternalCashClearingSystem1Code(SimpleText):
    min_length = 1
    max_length = 3


class ClearingSystemIdentification3Choice(ChoiceModel):
    cd: ExternalCashClearingSystem1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class CompensationResponse1(ISOModel):
    grantd: bool = Field(alias="Grantd")
    initl_amt: ActiveCurrencyAndAmount | None = Field(None, alias="InitlAmt")
    pd_chrgs: ActiveCurrencyAndAmount | None = Field(None, alias="PdChrgs")
    amt_due: ActiveCurrencyAndAmount | None = Field(None, alias="AmtDue")
    xpctd_val_dt: ISODate | None = Field(None, alias="XpctdValDt")
    prd: DatePeriod2 | None = Field(None, alias="Prd")
    intrst_rate: Decimal | None = Field(None, alias="IntrstRate")
    rsn: Max140Text | None = Field(None, alias="Rsn")


class MandateClassification1Code(str, Enum):
    FIXE = "FIXE"
    USGB = "USGB"
    VARI = "VARI"


class MandateClassification1Choice(ChoiceModel):
    cd: MandateClassification1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class ExternalServiceLevel1Code(SimpleText):
    min_length = 1
    max_length = 4


class ServiceLevel8Choice(ChoiceModel):
    cd: ExternalServiceLevel1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class MandateTypeInformation2(ISOModel):
    svc_lvl: ServiceLevel8Choice | None = Field(None, alias="SvcLvl")
    lcl_instrm: LocalInstrument2Choice | None = Field(None, alias="LclInstrm")
    ctgy_purp: CategoryPurpose1Choice | None = Field(None, alias="CtgyPurp")
    clssfctn: MandateClassification1Choice | None = Field(None, alias="Clssfctn")


class CreditTransferMandateData1(ISOModel):
    mndt_id: Max35Text | None = Field(None, alias="MndtId")
    tp: MandateTypeInformation2 | None = Field(None, alias="Tp")
    dt_of_sgntr: str | None = Field(None, alias="DtOfSgntr")
    dt_of_vrfctn: str | None = Field(None, alias="DtOfVrfctn")
    elctrnc_sgntr: Max10KBinary | None = Field(None, alias="ElctrncSgntr")
    frst_pmt_dt: ISODate | None = Field(None, alias="FrstPmtDt")
    fnl_pmt_dt: ISODate | None = Field(None, alias="FnlPmtDt")
    frqcy: Frequency36Choice | None = Field(None, alias="Frqcy")
    rsn: MandateSetupReason1Choice | None = Field(None, alias="Rsn")


class DebitAuthorisationConfirmation3(ISOModel):
    dbt_authstn: bool = Field(alias="DbtAuthstn")
    amt_to_dbt: ActiveCurrencyAndAmount | None = Field(None, alias="AmtToDbt")
    acct: CashAccount40 | None = Field(None, alias="Acct")
    val_dt_to_dbt: ISODate | None = Field(None, alias="ValDtToDbt")
    cmon_tx_id: Max52Text | None = Field(None, alias="CmonTxId")
    rsn: Max140Text | None = Field(None, alias="Rsn")


class ExternalDocumentFormat1Code(SimpleText):
    min_length = 1
    max_length = 4


class DocumentFormat1Choice(ChoiceModel):
    cd: ExternalDocumentFormat1Code | None = Field(None, alias="Cd")
    prtry: GenericIdentification1 | None = Field(None, alias="Prtry")


class DocumentType1Choice(ChoiceModel):
    cd: ExternalDocumentType1Code | None = Field(None, alias="Cd")
    prtry: GenericIdentification1 | None = Field(None, alias="Prtry")


class Max10MbBinary(SimpleText):
    min_length = 1
    max_length = 10485760


class PartyAndSignature3(ISOModel):
    pty: PartyIdentification135 = Field(alias="Pty")
    sgntr: SkipPayload = Field(alias="Sgntr")


class Document12(ISOModel):
    tp: DocumentType1Choice = Field(alias="Tp")
    id: Max35Text = Field(alias="Id")
    isse_dt: DateAndDateTime2Choice = Field(alias="IsseDt")
    nm: Max140Text | None = Field(None, alias="Nm")
    lang_cd: str | None = Field(None, alias="LangCd")
    frmt: DocumentFormat1Choice = Field(alias="Frmt")
    file_nm: Max140Text | None = Field(None, alias="FileNm")
    dgtl_sgntr: PartyAndSignature3 | None = Field(None, alias="DgtlSgntr")
    nclsr: Max10MbBinary = Field(alias="Nclsr")


class ExternalInvestigationAction1Code(SimpleText):
    min_length = 1
    max_length = 4


class ExternalInvestigationActionReason1Code(SimpleText):
    min_length = 1
    max_length = 4


class ExternalInvestigationInstrument1Code(SimpleText):
    min_length = 1
    max_length = 4


class ExternalInvestigationReason1Code(SimpleText):
    min_length = 1
    max_length = 4


class ExternalInvestigationReasonSubType1Code(SimpleText):
    min_length = 1
    max_length = 4


class ExternalInvestigationServiceLevel1Code(SimpleText):
    min_length = 1
    max_length = 4


class ExternalInvestigationStatus1Code(SimpleText):
    min_length = 1
    max_length = 4


class ExternalInvestigationStatusReason1Code(SimpleText):
    min_length = 1
    max_length = 4


class ExternalInvestigationSubType1Code(SimpleText):
    min_length = 1
    max_length = 4


class ExternalInvestigationType1Code(SimpleText):
    min_length = 1
    max_length = 4


class ExternalPaymentTransactionStatus1Code(SimpleText):
    min_length = 1
    max_length = 4


class ExternalStatusReason1Code(SimpleText):
    min_length = 1
    max_length = 4


class FileData1(ISOModel):
    tp: DocumentType1Choice | None = Field(None, alias="Tp")
    id: Max35Text = Field(alias="Id")
    isse_dt: DateAndDateTime2Choice | None = Field(None, alias="IsseDt")
    frmt: DocumentFormat1Choice | None = Field(None, alias="Frmt")
    file_nm: Max140Text | None = Field(None, alias="FileNm")
    ntwk_ref: Max140Text | None = Field(None, alias="NtwkRef")
    file_lctn_elctrnc_adr: Max2048Text | None = Field(None, alias="FileLctnElctrncAdr")


class InvestigationActionReason1Choice(ChoiceModel):
    cd: ExternalInvestigationActionReason1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class InvestigationActionReason1(ISOModel):
    orgtr: PartyIdentification135 | None = Field(None, alias="Orgtr")
    rsn: InvestigationActionReason1Choice = Field(alias="Rsn")
    addtl_inf: list[Max105Text] | None = Field(None, alias="AddtlInf")


class StatusReason6Choice(ChoiceModel):
    cd: ExternalStatusReason1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class StatusReasonInformation12(ISOModel):
    orgtr: PartyIdentification135 | None = Field(None, alias="Orgtr")
    rsn: StatusReason6Choice | None = Field(None, alias="Rsn")
    addtl_inf: list[Max105Text] | None = Field(None, alias="AddtlInf")


class TransactionStatus1Choice(ChoiceModel):
    cd: ExternalPaymentTransactionStatus1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class PaymentTransactionStatus1(ISOModel):
    sts: TransactionStatus1Choice = Field(alias="Sts")
    sts_rsn_inf: list[StatusReasonInformation12] | None = Field(None, alias="StsRsnInf")


class Remittance1(ISOModel):
    ustrd: list[Max140Text] | None = Field(None, alias="Ustrd")
    strd: list[StructuredRemittanceInformation16] | None = Field(None, alias="Strd")
    rltd: list[RemittanceLocation7] | None = Field(None, alias="Rltd")


class TransactionAmendment1Choice(ChoiceModel):
    agt: BranchAndFinancialInstitutionIdentification6 | None = Field(None, alias="Agt")
    amt: ActiveCurrencyAndAmount | None = Field(None, alias="Amt")
    any_bic: AnyBICDec2014Identifier | None = Field(None, alias="AnyBIC")
    bicfi: BICFIDec2014Identifier | None = Field(None, alias="BICFI")
    csh_acct: CashAccount40 | None = Field(None, alias="CshAcct")
    cd: Max4Text | None = Field(None, alias="Cd")
    dt: ISODate | None = Field(None, alias="Dt")
    dt_tm: ISODateTime | None = Field(None, alias="DtTm")
    pty: PartyIdentification135 | None = Field(None, alias="Pty")
    rmt: Remittance1 | None = Field(None, alias="Rmt")
    othr: Max140Text | None = Field(None, alias="Othr")


class TransactionAmendment1(ISOModel):
    pth: Max2048Text | None = Field(None, alias="Pth")
    rcrd: TransactionAmendment1Choice = Field(alias="Rcrd")


class InvestigationDataRecord1Choice(ChoiceModel):
    dbt_authstn: DebitAuthorisationConfirmation3 | None = Field(None, alias="DbtAuthstn")
    compstn: CompensationResponse1 | None = Field(None, alias="Compstn")
    valtn: AdjustmentCompensation1 | None = Field(None, alias="Valtn")
    conf: BookingConfirmation1 | None = Field(None, alias="Conf")
    tx_sts: PaymentTransactionStatus1 | None = Field(None, alias="TxSts")
    tx_data: list[TransactionAmendment1] | None = Field(None, alias="TxData")
    rspn_nrrtv: Max500Text | None = Field(None, alias="RspnNrrtv")


class InvestigationReason1Choice(ChoiceModel):
    cd: ExternalInvestigationReason1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class InvestigationReasonSubType1Choice(ChoiceModel):
    cd: ExternalInvestigationReasonSubType1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class InvestigationLocationMethod1Code(str, Enum):
    EDIC = "EDIC"
    EMAL = "EMAL"
    FAXI = "FAXI"
    POST = "POST"
    SMSM = "SMSM"
    URID = "URID"


class InvestigationLocationData1(ISOModel):
    mtd: InvestigationLocationMethod1Code = Field(alias="Mtd")
    elctrnc_adr: Max2048Text | None = Field(None, alias="ElctrncAdr")
    pstl_adr: NameAndAddress16 | None = Field(None, alias="PstlAdr")


class RelatedInvestigationData1(ISOModel):
    invstgtn_id: Max35Text | None = Field(None, alias="InvstgtnId")
    lctn: list[InvestigationLocationData1] | None = Field(None, alias="Lctn")


class InvestigationData2(ISOModel):
    orgnl_invstgtn_seq: Decimal | None = Field(None, alias="OrgnlInvstgtnSeq")
    orgnl_invstgtn_rsn: InvestigationReason1Choice | None = Field(None, alias="OrgnlInvstgtnRsn")
    orgnl_invstgtn_rsn_sub_tp: InvestigationReasonSubType1Choice | None = Field(
        None, alias="OrgnlInvstgtnRsnSubTp"
    )
    rspn_data: InvestigationDataRecord1Choice = Field(alias="RspnData")
    rltd_invstgtn_data: RelatedInvestigationData1 | None = Field(None, alias="RltdInvstgtnData")
    nclsd_file: list[Document12] | None = Field(None, alias="NclsdFile")
    rltd_file_data: list[FileData1] | None = Field(None, alias="RltdFileData")
    rspn_orgtr: Party40Choice | None = Field(None, alias="RspnOrgtr")


class InvestigationRequestAction1Choice(ChoiceModel):
    cd: ExternalInvestigationAction1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class InvestigationRequestAction1(ISOModel):
    actn: InvestigationRequestAction1Choice = Field(alias="Actn")
    actn_rsn: InvestigationActionReason1 | None = Field(None, alias="ActnRsn")


class InvestigationServiceLevel1Choice(ChoiceModel):
    cd: ExternalInvestigationServiceLevel1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class InvestigationSubType1Choice(ChoiceModel):
    cd: ExternalInvestigationSubType1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class InvestigationType1Choice(ChoiceModel):
    cd: ExternalInvestigationType1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class MandateRelatedInformation15(ISOModel):
    mndt_id: Max35Text | None = Field(None, alias="MndtId")
    dt_of_sgntr: str | None = Field(None, alias="DtOfSgntr")
    amdmnt_ind: bool | None = Field(None, alias="AmdmntInd")
    amdmnt_inf_dtls: AmendmentInformationDetails14 | None = Field(None, alias="AmdmntInfDtls")
    elctrnc_sgntr: Max1025Text | None = Field(None, alias="ElctrncSgntr")
    frst_colltn_dt: ISODate | None = Field(None, alias="FrstColltnDt")
    fnl_colltn_dt: ISODate | None = Field(None, alias="FnlColltnDt")
    frqcy: Frequency36Choice | None = Field(None, alias="Frqcy")
    rsn: MandateSetupReason1Choice | None = Field(None, alias="Rsn")
    trckg_days: Exact2NumericText | None = Field(None, alias="TrckgDays")


class MandateRelatedData2Choice(ChoiceModel):
    drct_dbt_mndt: MandateRelatedInformation15 | None = Field(None, alias="DrctDbtMndt")
    cdt_trf_mndt: CreditTransferMandateData1 | None = Field(None, alias="CdtTrfMndt")


class PaymentMethod4Code(str, Enum):
    CHK = "CHK"
    TRF = "TRF"
    DD = "DD"
    TRA = "TRA"


class SequenceType3Code(str, Enum):
    FRST = "FRST"
    RCUR = "RCUR"
    FNAL = "FNAL"
    OOFF = "OOFF"
    RPRE = "RPRE"


class PaymentTypeInformation27(ISOModel):
    instr_prty: Priority2Code | None = Field(None, alias="InstrPrty")
    clr_chanl: ClearingChannel2Code | None = Field(None, alias="ClrChanl")
    svc_lvl: list[ServiceLevel8Choice] | None = Field(None, alias="SvcLvl")
    lcl_instrm: LocalInstrument2Choice | None = Field(None, alias="LclInstrm")
    seq_tp: SequenceType3Code | None = Field(None, alias="SeqTp")
    ctgy_purp: CategoryPurpose1Choice | None = Field(None, alias="CtgyPurp")


class TaxRecordDetails3(ISOModel):
    prd: TaxPeriod3 | None = Field(None, alias="Prd")
    amt: ActiveOrHistoricCurrencyAndAmount = Field(alias="Amt")


class TaxAmount3(ISOModel):
    rate: Decimal | None = Field(None, alias="Rate")
    taxbl_base_amt: ActiveOrHistoricCurrencyAndAmount | None = Field(None, alias="TaxblBaseAmt")
    ttl_amt: ActiveOrHistoricCurrencyAndAmount | None = Field(None, alias="TtlAmt")
    dtls: list[TaxRecordDetails3] | None = Field(None, alias="Dtls")


class TaxRecord3(ISOModel):
    tp: Max35Text | None = Field(None, alias="Tp")
    ctgy: Max35Text | None = Field(None, alias="Ctgy")
    ctgy_dtls: Max35Text | None = Field(None, alias="CtgyDtls")
    dbtr_sts: Max35Text | None = Field(None, alias="DbtrSts")
    cert_id: Max35Text | None = Field(None, alias="CertId")
    frms_cd: Max35Text | None = Field(None, alias="FrmsCd")
    prd: TaxPeriod3 | None = Field(None, alias="Prd")
    tax_amt: TaxAmount3 | None = Field(None, alias="TaxAmt")
    addtl_inf: Max140Text | None = Field(None, alias="AddtlInf")


class TaxData1(ISOModel):
    cdtr: TaxParty1 | None = Field(None, alias="Cdtr")
    dbtr: TaxParty2 | None = Field(None, alias="Dbtr")
    ultmt_dbtr: TaxParty2 | None = Field(None, alias="UltmtDbtr")
    admstn_zone: Max35Text | None = Field(None, alias="AdmstnZone")
    ref_nb: Max140Text | None = Field(None, alias="RefNb")
    mtd: Max35Text | None = Field(None, alias="Mtd")
    ttl_taxbl_base_amt: ActiveOrHistoricCurrencyAndAmount | None = Field(
        None, alias="TtlTaxblBaseAmt"
    )
    ttl_tax_amt: ActiveOrHistoricCurrencyAndAmount | None = Field(None, alias="TtlTaxAmt")
    dt: ISODate | None = Field(None, alias="Dt")
    seq_nb: Decimal | None = Field(None, alias="SeqNb")
    rcrd: list[TaxRecord3] | None = Field(None, alias="Rcrd")


class StructuredRemittanceInformation17(ISOModel):
    rfrd_doc_inf: list[ReferredDocumentInformation7] | None = Field(None, alias="RfrdDocInf")
    rfrd_doc_amt: RemittanceAmount2 | None = Field(None, alias="RfrdDocAmt")
    cdtr_ref_inf: CreditorReferenceInformation2 | None = Field(None, alias="CdtrRefInf")
    invcr: PartyIdentification135 | None = Field(None, alias="Invcr")
    invcee: PartyIdentification135 | None = Field(None, alias="Invcee")
    tax_rmt: TaxData1 | None = Field(None, alias="TaxRmt")
    grnshmt_rmt: Garnishment3 | None = Field(None, alias="GrnshmtRmt")
    addtl_rmt_inf: list[Max140Text] | None = Field(None, alias="AddtlRmtInf")


class RemittanceInformation21(ISOModel):
    ustrd: list[Max140Text] | None = Field(None, alias="Ustrd")
    strd: list[StructuredRemittanceInformation17] | None = Field(None, alias="Strd")


class SettlementMethod1Code(str, Enum):
    INDA = "INDA"
    INGA = "INGA"
    COVE = "COVE"
    CLRG = "CLRG"


class SettlementInstruction11(ISOModel):
    sttlm_mtd: SettlementMethod1Code = Field(alias="SttlmMtd")
    sttlm_acct: CashAccount40 | None = Field(None, alias="SttlmAcct")
    clr_sys: ClearingSystemIdentification3Choice | None = Field(None, alias="ClrSys")
    instg_rmbrsmnt_agt: BranchAndFinancialInstitutionIdentification6 | None = Field(
        None, alias="InstgRmbrsmntAgt"
    )
    instg_rmbrsmnt_agt_acct: CashAccount40 | None = Field(None, alias="InstgRmbrsmntAgtAcct")
    instd_rmbrsmnt_agt: BranchAndFinancialInstitutionIdentification6 | None = Field(
        None, alias="InstdRmbrsmntAgt"
    )
    instd_rmbrsmnt_agt_acct: CashAccount40 | None = Field(None, alias="InstdRmbrsmntAgtAcct")
    thrd_rmbrsmnt_agt: BranchAndFinancialInstitutionIdentification6 | None = Field(
        None, alias="ThrdRmbrsmntAgt"
    )
    thrd_rmbrsmnt_agt_acct: CashAccount40 | None = Field(None, alias="ThrdRmbrsmntAgtAcct")


class OriginalTransactionReference35(ISOModel):
    intr_bk_sttlm_amt: ActiveOrHistoricCurrencyAndAmount | None = Field(
        None, alias="IntrBkSttlmAmt"
    )
    amt: AmountType4Choice | None = Field(None, alias="Amt")
    intr_bk_sttlm_dt: ISODate | None = Field(None, alias="IntrBkSttlmDt")
    reqd_colltn_dt: ISODate | None = Field(None, alias="ReqdColltnDt")
    reqd_exctn_dt: DateAndDateTime2Choice | None = Field(None, alias="ReqdExctnDt")
    cdtr_schme_id: PartyIdentification135 | None = Field(None, alias="CdtrSchmeId")
    sttlm_inf: SettlementInstruction11 | None = Field(None, alias="SttlmInf")
    pmt_tp_inf: PaymentTypeInformation27 | None = Field(None, alias="PmtTpInf")
    pmt_mtd: PaymentMethod4Code | None = Field(None, alias="PmtMtd")
    mndt_rltd_inf: MandateRelatedData2Choice | None = Field(None, alias="MndtRltdInf")
    rmt_inf: RemittanceInformation21 | None = Field(None, alias="RmtInf")
    ultmt_dbtr: Party40Choice | None = Field(None, alias="UltmtDbtr")
    dbtr: Party40Choice | None = Field(None, alias="Dbtr")
    dbtr_acct: CashAccount40 | None = Field(None, alias="DbtrAcct")
    dbtr_agt: BranchAndFinancialInstitutionIdentification6 | None = Field(None, alias="DbtrAgt")
    dbtr_agt_acct: CashAccount40 | None = Field(None, alias="DbtrAgtAcct")
    cdtr_agt: BranchAndFinancialInstitutionIdentification6 | None = Field(None, alias="CdtrAgt")
    cdtr_agt_acct: CashAccount40 | None = Field(None, alias="CdtrAgtAcct")
    cdtr: Party40Choice | None = Field(None, alias="Cdtr")
    cdtr_acct: CashAccount40 | None = Field(None, alias="CdtrAcct")
    ultmt_cdtr: Party40Choice | None = Field(None, alias="UltmtCdtr")
    purp: Purpose2Choice | None = Field(None, alias="Purp")


class UnderlyingGroupInformation1(ISOModel):
    orgnl_msg_id: Max35Text = Field(alias="OrgnlMsgId")
    orgnl_msg_nm_id: Max35Text = Field(alias="OrgnlMsgNmId")
    orgnl_cre_dt_tm: ISODateTime | None = Field(None, alias="OrgnlCreDtTm")
    orgnl_msg_dlvry_chanl: Max35Text | None = Field(None, alias="OrgnlMsgDlvryChanl")


class UnderlyingPaymentInstruction8(ISOModel):
    orgnl_grp_inf: UnderlyingGroupInformation1 | None = Field(None, alias="OrgnlGrpInf")
    orgnl_pmt_inf_id: Max35Text | None = Field(None, alias="OrgnlPmtInfId")
    orgnl_instr_id: Max35Text | None = Field(None, alias="OrgnlInstrId")
    orgnl_end_to_end_id: Max35Text | None = Field(None, alias="OrgnlEndToEndId")
    orgnl_uetr: UUIDv4Identifier | None = Field(None, alias="OrgnlUETR")
    orgnl_instd_amt: ActiveOrHistoricCurrencyAndAmount | None = Field(None, alias="OrgnlInstdAmt")
    reqd_exctn_dt: DateAndDateTime2Choice | None = Field(None, alias="ReqdExctnDt")
    reqd_colltn_dt: ISODate | None = Field(None, alias="ReqdColltnDt")
    orgnl_tx_ref: OriginalTransactionReference35 | None = Field(None, alias="OrgnlTxRef")
    orgnl_svc_lvl: ServiceLevel8Choice | None = Field(None, alias="OrgnlSvcLvl")


class UnderlyingPaymentTransaction7(ISOModel):
    orgnl_grp_inf: UnderlyingGroupInformation1 | None = Field(None, alias="OrgnlGrpInf")
    orgnl_instr_id: Max35Text | None = Field(None, alias="OrgnlInstrId")
    orgnl_end_to_end_id: Max35Text | None = Field(None, alias="OrgnlEndToEndId")
    orgnl_tx_id: Max35Text | None = Field(None, alias="OrgnlTxId")
    orgnl_uetr: UUIDv4Identifier | None = Field(None, alias="OrgnlUETR")
    orgnl_intr_bk_sttlm_amt: ActiveOrHistoricCurrencyAndAmount | None = Field(
        None, alias="OrgnlIntrBkSttlmAmt"
    )
    orgnl_intr_bk_sttlm_dt: ISODate | None = Field(None, alias="OrgnlIntrBkSttlmDt")
    orgnl_tx_ref: OriginalTransactionReference35 | None = Field(None, alias="OrgnlTxRef")
    orgnl_svc_lvl: ServiceLevel8Choice | None = Field(None, alias="OrgnlSvcLvl")


class OriginalGroupInformation29(ISOModel):
    orgnl_msg_id: Max35Text = Field(alias="OrgnlMsgId")
    orgnl_msg_nm_id: Max35Text = Field(alias="OrgnlMsgNmId")
    orgnl_cre_dt_tm: ISODateTime | None = Field(None, alias="OrgnlCreDtTm")


class UnderlyingStatementEntry5(ISOModel):
    orgnl_acct: CashAccount40 | None = Field(None, alias="OrgnlAcct")
    orgnl_grp_inf: OriginalGroupInformation29 | None = Field(None, alias="OrgnlGrpInf")
    orgnl_stmt_id: Max35Text | None = Field(None, alias="OrgnlStmtId")
    orgnl_ntry_ref: Max35Text | None = Field(None, alias="OrgnlNtryRef")
    orgnl_uetr: UUIDv4Identifier | None = Field(None, alias="OrgnlUETR")
    orgnl_ntry_amt: ActiveOrHistoricCurrencyAndAmount | None = Field(None, alias="OrgnlNtryAmt")
    orgnl_ntry_val_dt: DateAndDateTime2Choice | None = Field(None, alias="OrgnlNtryValDt")


class UnderlyingData2Choice(ChoiceModel):
    initn: UnderlyingPaymentInstruction8 | None = Field(None, alias="Initn")
    intr_bk: UnderlyingPaymentTransaction7 | None = Field(None, alias="IntrBk")
    stmt_ntry: UnderlyingStatementEntry5 | None = Field(None, alias="StmtNtry")
    acct: CashAccount40 | None = Field(None, alias="Acct")
    othr: GenericIdentification1 | None = Field(None, alias="Othr")


class UnderlyingInvestigationInstrument1Choice(ChoiceModel):
    cd: ExternalInvestigationInstrument1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class InvestigationRequest3(ISOModel):
    msg_id: Max35Text = Field(alias="MsgId")
    rqstr_invstgtn_id: Max35Text | None = Field(None, alias="RqstrInvstgtnId")
    rspndr_invstgtn_id: Max35Text | None = Field(None, alias="RspndrInvstgtnId")
    eir: UUIDv4Identifier | None = Field(None, alias="EIR")
    req_actn: InvestigationRequestAction1 | None = Field(None, alias="ReqActn")
    invstgtn_tp: InvestigationType1Choice = Field(alias="InvstgtnTp")
    invstgtn_sub_tp: InvestigationSubType1Choice | None = Field(None, alias="InvstgtnSubTp")
    undrlyg_instrm: UnderlyingInvestigationInstrument1Choice | None = Field(
        None, alias="UndrlygInstrm"
    )
    undrlyg: UnderlyingData2Choice | None = Field(None, alias="Undrlyg")
    rqstr: Party40Choice = Field(alias="Rqstr")
    rspndr: Party40Choice = Field(alias="Rspndr")
    req_orgtr: Party40Choice | None = Field(None, alias="ReqOrgtr")
    xpctd_rspndr: Party40Choice | None = Field(None, alias="XpctdRspndr")
    svc_lvl: list[InvestigationServiceLevel1Choice] | None = Field(None, alias="SvcLvl")


class InvestigationStatusReason1Choice(ChoiceModel):
    cd: ExternalInvestigationStatusReason1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class InvestigationStatus2(ISOModel):
    sts: ExternalInvestigationStatus1Code = Field(alias="Sts")
    sts_rsn: InvestigationStatusReason1Choice | None = Field(None, alias="StsRsn")


class InvestigationResponse3(ISOModel):
    msg_id: Max35Text = Field(alias="MsgId")
    rspndr_invstgtn_id: Max35Text | None = Field(None, alias="RspndrInvstgtnId")
    invstgtn_sts: InvestigationStatus2 = Field(alias="InvstgtnSts")
    nxt_rspndr: Party40Choice | None = Field(None, alias="NxtRspndr")
    invstgtn_data: list[InvestigationData2] | None = Field(None, alias="InvstgtnData")


@message("camt.111.001.01", "InvstgtnRspn")
class InvestigationResponseV01(ISOModel):
    """Message root of camt.111.001.01, carried in the <InvstgtnRspn> element."""

    invstgtn_rspn: InvestigationResponse3 = Field(alias="InvstgtnRspn")
    orgnl_invstgtn_req: InvestigationRequest3 = Field(alias="OrgnlInvstgtnReq")
    splmtry_data: list[SupplementaryData1] | None = Field(None, alias="SplmtryData")


class LanguageCode(SimpleText):
    pass
