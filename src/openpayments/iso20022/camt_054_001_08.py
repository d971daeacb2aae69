"""
camt.054.001.08 - BankToCustomerDebitCreditNotificationV08

Bank to customer debit credit notification, sent by an account servicer to inform the account owner
of single or multiple debit and/or credit entries booked to the account.

Only the types specific to this message are declared here; shared types come from
openpayments.iso20022.common.
"""

from decimal import Decimal
from enum import Enum

from pydantic import Field

from openpayments.domain.models import ChoiceModel, ISOModel, attribute, content
from openpayments.domain.registry import message
from openpayments.domain.types import SimpleDecimal, SimpleText
from openpayments.iso20022.common import (
    AccountIdentification4Choice,
    ActiveCurrencyAndAmount,
    ActiveOrHistoricCurrencyAndAmount,
    ActiveOrHistoricCurrencyCode,
    BankTransactionCodeStructure4,
    BranchAndFinancialInstitutionIdentification6,
    CashAccountType2Choice,
    Charges6,
    CopyDuplicate1Code,
    CreditDebitCode,
    DateAndDateTime2Choice,
    DatePeriod2,
    DateTimePeriod1,
    Exact1NumericText,
    Exact3NumericText,
    FinancialInstrumentQuantity1Choice,
    GenericIdentification1,
    GenericIdentification30,
    ISINOct2015Identifier,
    ISODate,
    ISODateTime,
    LocalInstrument2Choice,
    Max1025Text,
    Max105Text,
    Max140Text,
    Max15NumericText,
    Max15PlusSignedNumericText,
    Max16Text,
    Max35Text,
    Max3NumericText,
    Max500Text,
    Max70Text,
    OriginalBusinessQuery1,
    Pagination1,
    Party40Choice,
    PartyIdentification135,
    ProxyAccountIdentification1,
    Purpose2Choice,
    RemittanceLocation7,
    StructuredRemittanceInformation16,
    SupplementaryData1,
    TaxCharges2,
    TaxParty1,
    TaxParty2,
    TaxRecord2,
    TransactionReferences6,
)


class InterestType1Code(str, Enum):
    INDY = "INDY"
    OVRN = "OVRN"


class InterestType1Choice(ChoiceModel):
    cd: InterestType1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class AmountRangeBoundary1(ISOModel):
    bdry_amt: Decimal = Field(alias="BdryAmt")
    incl: bool = Field(alias="Incl")


class FromToAmountRange1(ISOModel):
    fr_amt: AmountRangeBoundary1 = Field(alias="FrAmt")
    to_amt: AmountRangeBoundary1 = Field(alias="ToAmt")


class ImpliedCurrencyAmountRange1Choice(ChoiceModel):
    fr_amt: AmountRangeBoundary1 | None = Field(None, alias="FrAmt")
    to_amt: AmountRangeBoundary1 | None = Field(None, alias="ToAmt")
    fr_to_amt: FromToAmountRange1 | None = Field(None, alias="FrToAmt")
    eq_amt: Decimal | None = Field(None, alias="EQAmt")
    neq_amt: Decimal | None = Field(None, alias="NEQAmt")


class ActiveOrHistoricCurrencyAndAmountRange2(ISOModel):
    amt: ImpliedCurrencyAmountRange1Choice = Field(alias="Amt")
    cdt_dbt_ind: CreditDebitCode | None = Field(None, alias="CdtDbtInd")
    ccy: ActiveOrHistoricCurrencyCode = Field(alias="Ccy")


class RateType4Choice(ChoiceModel):
    pctg: Decimal | None = Field(None, alias="Pctg")
    othr: Max35Text | None = Field(None, alias="Othr")


class Rate4(ISOModel):
    tp: RateType4Choice = Field(alias="Tp")
    vldty_rg: ActiveOrHistoricCurrencyAndAmountRange2 | None = Field(None, alias="VldtyRg")


class AccountInterest4(ISOModel):
    tp: InterestType1Choice | None = Field(None, alias="Tp")
    rate: list[Rate4] | None = Field(None, alias="Rate")
    fr_to_dt: DateTimePeriod1 | None = Field(None, alias="FrToDt")
    rsn: Max35Text | None = Field(None, alias="Rsn")
    tax: TaxCharges2 | None = Field(None, alias="Tax")


class CashAccount38(ISOModel):
    id: AccountIdentification4Choice = Field(alias="Id")
    tp: CashAccountType2Choice | None = Field(None, alias="Tp")
    ccy: ActiveOrHistoricCurrencyCode | None = Field(None, alias="Ccy")
    nm: Max70Text | None = Field(None, alias="Nm")
    prxy: ProxyAccountIdentification1 | None = Field(None, alias="Prxy")


class CashAccount39(ISOModel):
    id: AccountIdentification4Choice = Field(alias="Id")
    tp: CashAccountType2Choice | None = Field(None, alias="Tp")
    ccy: ActiveOrHistoricCurrencyCode | None = Field(None, alias="Ccy")
    nm: Max70Text | None = Field(None, alias="Nm")
    prxy: ProxyAccountIdentification1 | None = Field(None, alias="Prxy")
    ownr: PartyIdentification135 | None = Field(None, alias="Ownr")
    svcr: BranchAndFinancialInstitutionIdentification6 | None = Field(None, alias="Svcr")


class CurrencyExchange5(ISOModel):
    src_ccy: ActiveOrHistoricCurrencyCode = Field(alias="SrcCcy")
    trgt_ccy: ActiveOrHistoricCurrencyCode | None = Field(None, alias="TrgtCcy")
    unit_ccy: ActiveOrHistoricCurrencyCode | None = Field(None, alias="UnitCcy")
    xchg_rate: Decimal = Field(alias="XchgRate")
    ctrct_id: Max35Text | None = Field(None, alias="CtrctId")
    qtn_dt: ISODate | None = Field(None, alias="QtnDt")


class AmountAndCurrencyExchangeDetails3(ISOModel):
    amt: ActiveOrHistoricCurrencyAndAmount = Field(alias="Amt")
    ccy_xchg: CurrencyExchange5 | None = Field(None, alias="CcyXchg")


class AmountAndCurrencyExchangeDetails4(ISOModel):
    tp: Max35Text = Field(alias="Tp")
    amt: ActiveOrHistoricCurrencyAndAmount = Field(alias="Amt")
    ccy_xchg: CurrencyExchange5 | None = Field(None, alias="CcyXchg")


class AmountAndCurrencyExchange3(ISOModel):
    instd_amt: AmountAndCurrencyExchangeDetails3 | None = Field(None, alias="InstdAmt")
    tx_amt: AmountAndCurrencyExchangeDetails3 | None = Field(None, alias="TxAmt")
    cntr_val_amt: AmountAndCurrencyExchangeDetails3 | None = Field(None, alias="CntrValAmt")
    anncd_pstng_amt: AmountAndCurrencyExchangeDetails3 | None = Field(None, alias="AnncdPstngAmt")
    prtry_amt: list[AmountAndCurrencyExchangeDetails4] | None = Field(None, alias="PrtryAmt")


class CardPaymentServiceType2Code(str, Enum):
    AGGR = "AGGR"
    DCCV = "DCCV"
    GRTT = "GRTT"
    INSP = "INSP"
    LOYT = "LOYT"
    NRES = "NRES"
    PUCO = "PUCO"
    RECP = "RECP"
    SOAF = "SOAF"
    UNAF = "UNAF"
    VCAU = "VCAU"


class CardSequenceNumberRange1(ISOModel):
    frst_tx: Max35Text | None = Field(None, alias="FrstTx")
    last_tx: Max35Text | None = Field(None, alias="LastTx")


class DateOrDateTimePeriod1Choice(ChoiceModel):
    dt: DatePeriod2 | None = Field(None, alias="Dt")
    dt_tm: DateTimePeriod1 | None = Field(None, alias="DtTm")


class ExternalCardTransactionCategory1Code(SimpleText):
    min_length = 1
    max_length = 4


class CardAggregated2(ISOModel):
    addtl_svc: CardPaymentServiceType2Code | None = Field(None, alias="AddtlSvc")
    tx_ctgy: ExternalCardTransactionCategory1Code | None = Field(None, alias="TxCtgy")
    sale_rcncltn_id: Max35Text | None = Field(None, alias="SaleRcncltnId")
    seq_nb_rg: CardSequenceNumberRange1 | None = Field(None, alias="SeqNbRg")
    tx_dt_rg: DateOrDateTimePeriod1Choice | None = Field(None, alias="TxDtRg")


class CSCManagement1Code(str, Enum):
    PRST = "PRST"
    BYPS = "BYPS"
    UNRD = "UNRD"
    NCSC = "NCSC"


class Min3Max4NumericText(SimpleText):
    pattern = r"[0-9]{3,4}"


class CardSecurityInformation1(ISOModel):
    csc_mgmt: CSCManagement1Code = Field(alias="CSCMgmt")
    csc_val: Min3Max4NumericText | None = Field(None, alias="CSCVal")


class Min2Max3NumericText(SimpleText):
    pattern = r"[0-9]{2,3}"


class Min8Max28NumericText(SimpleText):
    pattern = r"[0-9]{8,28}"


class TrackData1(ISOModel):
    trck_nb: Exact1NumericText | None = Field(None, alias="TrckNb")
    trck_val: Max140Text = Field(alias="TrckVal")


class PlainCardData1(ISOModel):
    pan: Min8Max28NumericText = Field(alias="PAN")
    card_seq_nb: Min2Max3NumericText | None = Field(None, alias="CardSeqNb")
    fctv_dt: ISODate | None = Field(None, alias="FctvDt")
    xpry_dt: ISODate = Field(alias="XpryDt")
    svc_cd: Exact3NumericText | None = Field(None, alias="SvcCd")
    trck_data: list[TrackData1] | None = Field(None, alias="TrckData")
    card_scty_cd: CardSecurityInformation1 | None = Field(None, alias="CardSctyCd")


class PaymentCard4(ISOModel):
    plain_card_data: PlainCardData1 | None = Field(None, alias="PlainCardData")
    card_ctry_cd: Exact3NumericText | None = Field(None, alias="CardCtryCd")
    card_brnd: GenericIdentification1 | None = Field(None, alias="CardBrnd")
    addtl_card_data: Max70Text | None = Field(None, alias="AddtlCardData")


class PartyType3Code(str, Enum):
    OPOI = "OPOI"
    MERC = "MERC"
    ACCP = "ACCP"
    ITAG = "ITAG"
    ACQR = "ACQR"
    CISS = "CISS"
    DLIS = "DLIS"


class PartyType4Code(str, Enum):
    MERC = "MERC"
    ACCP = "ACCP"
    ITAG = "ITAG"
    ACQR = "ACQR"
    CISS = "CISS"
    TAXH = "TAXH"


class GenericIdentification32(ISOModel):
    id: Max35Text = Field(alias="Id")
    tp: PartyType3Code | None = Field(None, alias="Tp")
    issr: PartyType4Code | None = Field(None, alias="Issr")
    shrt_nm: Max35Text | None = Field(None, alias="ShrtNm")


class CardDataReading1Code(str, Enum):
    TAGC = "TAGC"
    PHYS = "PHYS"
    BRCD = "BRCD"
    MGST = "MGST"
    CICC = "CICC"
    DFLE = "DFLE"
    CTLS = "CTLS"
    ECTL = "ECTL"


class CardholderVerificationCapability1Code(str, Enum):
    MNSG = "MNSG"
    NPIN = "NPIN"
    FCPN = "FCPN"
    FEPN = "FEPN"
    FDSG = "FDSG"
    FBIO = "FBIO"
    MNVR = "MNVR"
    FBIG = "FBIG"
    APKI = "APKI"
    PKIS = "PKIS"
    CHDT = "CHDT"
    SCEC = "SCEC"


class UserInterface2Code(str, Enum):
    MDSP = "MDSP"
    CDSP = "CDSP"


class DisplayCapabilities1(ISOModel):
    disp_tp: UserInterface2Code = Field(alias="DispTp")
    nb_of_lines: Max3NumericText = Field(alias="NbOfLines")
    line_width: Max3NumericText = Field(alias="LineWidth")


class OnLineCapability1Code(str, Enum):
    OFLN = "OFLN"
    ONLN = "ONLN"
    SMON = "SMON"


class PointOfInteractionCapabilities1(ISOModel):
    card_rdng_cpblties: list[CardDataReading1Code] | None = Field(None, alias="CardRdngCpblties")
    crdhldr_vrfctn_cpblties: list[CardholderVerificationCapability1Code] | None = Field(
        None, alias="CrdhldrVrfctnCpblties"
    )
    on_line_cpblties: OnLineCapability1Code | None = Field(None, alias="OnLineCpblties")
    disp_cpblties: list[DisplayCapabilities1] | None = Field(None, alias="DispCpblties")
    prt_line_width: Max3NumericText | None = Field(None, alias="PrtLineWidth")


class POIComponentType1Code(str, Enum):
    SOFT = "SOFT"
    EMVK = "EMVK"
    EMVO = "EMVO"
    MRIT = "MRIT"
    CHIT = "CHIT"
    SECM = "SECM"
    PEDV = "PEDV"


class PointOfInteractionComponent1(ISOModel):
    poi_cmpnt_tp: POIComponentType1Code = Field(alias="POICmpntTp")
    manfctr_id: Max35Text | None = Field(None, alias="ManfctrId")
    mdl: Max35Text | None = Field(None, alias="Mdl")
    vrsn_nb: Max16Text | None = Field(None, alias="VrsnNb")
    srl_nb: Max35Text | None = Field(None, alias="SrlNb")
    apprvl_nb: list[Max70Text] | None = Field(None, alias="ApprvlNb")


class PointOfInteraction1(ISOModel):
    id: GenericIdentification32 = Field(alias="Id")
    sys_nm: Max70Text | None = Field(None, alias="SysNm")
    grp_id: Max35Text | None = Field(None, alias="GrpId")
    cpblties: PointOfInteractionCapabilities1 | None = Field(None, alias="Cpblties")
    cmpnt: list[PointOfInteractionComponent1] | None = Field(None, alias="Cmpnt")


class CardEntry4(ISOModel):
    card: PaymentCard4 | None = Field(None, alias="Card")
    poi: PointOfInteraction1 | None = Field(None, alias="POI")
    aggtd_ntry: CardAggregated2 | None = Field(None, alias="AggtdNtry")
    pre_pd_acct: CashAccount38 | None = Field(None, alias="PrePdAcct")


class CashAvailabilityDate1Choice(ChoiceModel):
    nb_of_days: Max15PlusSignedNumericText | None = Field(None, alias="NbOfDays")
    actl_dt: ISODate | None = Field(None, alias="ActlDt")


class CashAvailability1(ISOModel):
    dt: CashAvailabilityDate1Choice = Field(alias="Dt")
    amt: ActiveOrHistoricCurrencyAndAmount = Field(alias="Amt")
    cdt_dbt_ind: CreditDebitCode = Field(alias="CdtDbtInd")


class BatchInformation2(ISOModel):
    msg_id: Max35Text | None = Field(None, alias="MsgId")
    pmt_inf_id: Max35Text | None = Field(None, alias="PmtInfId")
    nb_of_txs: Max15NumericText | None = Field(None, alias="NbOfTxs")
    ttl_amt: ActiveOrHistoricCurrencyAndAmount | None = Field(None, alias="TtlAmt")
    cdt_dbt_ind: CreditDebitCode | None = Field(None, alias="CdtDbtInd")


class ExternalRePresentmentReason1Code(SimpleText):
    min_length = 1
    max_length = 4


class AttendanceContext1Code(str, Enum):
    ATTD = "ATTD"
    SATT = "SATT"
    UATT = "UATT"


class AuthenticationEntity1Code(str, Enum):
    ICCD = "ICCD"
    AGNT = "AGNT"
    MERC = "MERC"


class AuthenticationMethod1Code(str, Enum):
    UKNW = "UKNW"
    BYPS = "BYPS"
    NPIN = "NPIN"
    FPIN = "FPIN"
    CPSG = "CPSG"
    PPSG = "PPSG"
    MANU = "MANU"
    MERC = "MERC"
    SCRT = "SCRT"
    SNCT = "SNCT"
    SCNL = "SCNL"


class CardholderAuthentication2(ISOModel):
    authntcn_mtd: AuthenticationMethod1Code = Field(alias="AuthntcnMtd")
    authntcn_ntty: AuthenticationEntity1Code = Field(alias="AuthntcnNtty")


class ISO2ALanguageCode(SimpleText):
    pattern = r"[a-z]{2,2}"


class TransactionChannel1Code(str, Enum):
    MAIL = "MAIL"
    TLPH = "TLPH"
    ECOM = "ECOM"
    TVPY = "TVPY"


class TransactionEnvironment1Code(str, Enum):
    MERC = "MERC"
    PRIV = "PRIV"
    PUBL = "PUBL"


class PaymentContext3(ISOModel):
    card_pres: bool | None = Field(None, alias="CardPres")
    crdhldr_pres: bool | None = Field(None, alias="CrdhldrPres")
    on_line_cntxt: bool | None = Field(None, alias="OnLineCntxt")
    attndnc_cntxt: AttendanceContext1Code | None = Field(None, alias="AttndncCntxt")
    tx_envt: TransactionEnvironment1Code | None = Field(None, alias="TxEnvt")
    tx_chanl: TransactionChannel1Code | None = Field(None, alias="TxChanl")
    attndnt_msg_cpbl: bool | None = Field(None, alias="AttndntMsgCpbl")
    attndnt_lang: ISO2ALanguageCode | None = Field(None, alias="AttndntLang")
    card_data_ntry_md: CardDataReading1Code = Field(alias="CardDataNtryMd")
    fllbck_ind: bool | None = Field(None, alias="FllbckInd")
    authntcn_mtd: CardholderAuthentication2 | None = Field(None, alias="AuthntcnMtd")


class UnitOfMeasure1Code(str, Enum):
    PIEC = "PIEC"
    TONS = "TONS"
    FOOT = "FOOT"
    GBGA = "GBGA"
    USGA = "USGA"
    GRAM = "GRAM"
    INCH = "INCH"
    KILO = "KILO"
    PUND = "PUND"
    METR = "METR"
    CMET = "CMET"
    MMET = "MMET"
    LITR = "LITR"
    CELI = "CELI"
    MILI = "MILI"
    GBOU = "GBOU"
    USOU = "USOU"
    GBQA = "GBQA"
    USQA = "USQA"
    GBPI = "GBPI"
    USPI = "USPI"
    MILE = "MILE"
    KMET = "KMET"
    YARD = "YARD"
    SQKI = "SQKI"
    HECT = "HECT"
    ARES = "ARES"
    SMET = "SMET"
    SCMT = "SCMT"
    SMIL = "SMIL"
    SQMI = "SQMI"
    SQYA = "SQYA"
    SQFO = "SQFO"
    SQIN = "SQIN"
    ACRE = "ACRE"


class Product2(ISOModel):
    pdct_cd: Max70Text = Field(alias="PdctCd")
    unit_of_measr: UnitOfMeasure1Code | None = Field(None, alias="UnitOfMeasr")
    pdct_qty: Decimal | None = Field(None, alias="PdctQty")
    unit_pric: Decimal | None = Field(None, alias="UnitPric")
    pdct_amt: Decimal | None = Field(None, alias="PdctAmt")
    tax_tp: Max35Text | None = Field(None, alias="TaxTp")
    addtl_pdct_inf: Max35Text | None = Field(None, alias="AddtlPdctInf")


class TransactionIdentifier1(ISOModel):
    tx_dt_tm: ISODateTime = Field(alias="TxDtTm")
    tx_ref: Max35Text = Field(alias="TxRef")


class CardIndividualTransaction2(ISOModel):
    icc_rltd_data: Max1025Text | None = Field(None, alias="ICCRltdData")
    pmt_cntxt: PaymentContext3 | None = Field(None, alias="PmtCntxt")
    addtl_svc: CardPaymentServiceType2Code | None = Field(None, alias="AddtlSvc")
    tx_ctgy: ExternalCardTransactionCategory1Code | None = Field(None, alias="TxCtgy")
    sale_rcncltn_id: Max35Text | None = Field(None, alias="SaleRcncltnId")
    sale_ref_nb: Max35Text | None = Field(None, alias="SaleRefNb")
    re_presntmnt_rsn: ExternalRePresentmentReason1Code | None = Field(None, alias="RePresntmntRsn")
    seq_nb: Max35Text | None = Field(None, alias="SeqNb")
    tx_id: TransactionIdentifier1 | None = Field(None, alias="TxId")
    pdct: Product2 | None = Field(None, alias="Pdct")
    vldtn_dt: ISODate | None = Field(None, alias="VldtnDt")
    vldtn_seq_nb: Max35Text | None = Field(None, alias="VldtnSeqNb")


class CardTransaction3Choice(ChoiceModel):
    aggtd: CardAggregated2 | None = Field(None, alias="Aggtd")
    indv: CardIndividualTransaction2 | None = Field(None, alias="Indv")


class CardTransaction17(ISOModel):
    card: PaymentCard4 | None = Field(None, alias="Card")
    poi: PointOfInteraction1 | None = Field(None, alias="POI")
    tx: CardTransaction3Choice | None = Field(None, alias="Tx")
    pre_pd_acct: CashAccount38 | None = Field(None, alias="PrePdAcct")


class CashDeposit1(ISOModel):
    note_dnmtn: ActiveCurrencyAndAmount = Field(alias="NoteDnmtn")
    nb_of_notes: Max15NumericText = Field(alias="NbOfNotes")
    amt: ActiveCurrencyAndAmount = Field(alias="Amt")


class CorporateAction9(ISOModel):
    evt_tp: Max35Text = Field(alias="EvtTp")
    evt_id: Max35Text = Field(alias="EvtId")


class ExternalReturnReason1Code(SimpleText):
    min_length = 1
    max_length = 4


class ReturnReason5Choice(ChoiceModel):
    cd: ExternalReturnReason1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class PaymentReturnReason5(ISOModel):
    orgnl_bk_tx_cd: BankTransactionCodeStructure4 | None = Field(None, alias="OrgnlBkTxCd")
    orgtr: PartyIdentification135 | None = Field(None, alias="Orgtr")
    rsn: ReturnReason5Choice | None = Field(None, alias="Rsn")
    addtl_inf: list[Max105Text] | None = Field(None, alias="AddtlInf")


class RemittanceInformation16(ISOModel):
    ustrd: list[Max140Text] | None = Field(None, alias="Ustrd")
    strd: list[StructuredRemittanceInformation16] | None = Field(None, alias="Strd")


class SecuritiesAccount19(ISOModel):
    id: Max35Text = Field(alias="Id")
    tp: GenericIdentification30 | None = Field(None, alias="Tp")
    nm: Max70Text | None = Field(None, alias="Nm")


class ExternalFinancialInstrumentIdentificationType1Code(SimpleText):
    min_length = 1
    max_length = 4


class IdentificationSource3Choice(ChoiceModel):
    cd: ExternalFinancialInstrumentIdentificationType1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class OtherIdentification1(ISOModel):
    id: Max35Text = Field(alias="Id")
    sfx: Max16Text | None = Field(None, alias="Sfx")
    tp: IdentificationSource3Choice = Field(alias="Tp")


class SecurityIdentification19(ISOModel):
    isin: ISINOct2015Identifier | None = Field(None, alias="ISIN")
    othr_id: list[OtherIdentification1] | None = Field(None, alias="OthrId")
    desc: Max140Text | None = Field(None, alias="Desc")


class TaxInformation8(ISOModel):
    cdtr: TaxParty1 | None = Field(None, alias="Cdtr")
    dbtr: TaxParty2 | None = Field(None, alias="Dbtr")
    admstn_zone: Max35Text | None = Field(None, alias="AdmstnZone")
    ref_nb: Max140Text | None = Field(None, alias="RefNb")
    mtd: Max35Text | None = Field(None, alias="Mtd")
    ttl_taxbl_base_amt: ActiveOrHistoricCurrencyAndAmount | None = Field(
        None, alias="TtlTaxblBaseAmt"
    )
    ttl_tax_amt: ActiveOrHistoricCurrencyAndAmount | None = Field(None, alias="TtlTaxAmt")
    dt: ISODate | None = Field(None, alias="Dt")
    seq_nb: Decimal | None = Field(None, alias="SeqNb")
    rcrd: list[TaxRecord2] | None = Field(None, alias="Rcrd")


class ProprietaryAgent4(ISOModel):
    tp: Max35Text = Field(alias="Tp")
    agt: BranchAndFinancialInstitutionIdentification6 = Field(alias="Agt")


class TransactionAgents5(ISOModel):
    instg_agt: BranchAndFinancialInstitutionIdentification6 | None = Field(None, alias="InstgAgt")
    instd_agt: BranchAndFinancialInstitutionIdentification6 | None = Field(None, alias="InstdAgt")
    dbtr_agt: BranchAndFinancialInstitutionIdentification6 | None = Field(None, alias="DbtrAgt")
    cdtr_agt: BranchAndFinancialInstitutionIdentification6 | None = Field(None, alias="CdtrAgt")
    intrmy_agt1: BranchAndFinancialInstitutionIdentification6 | None = Field(
        None, alias="IntrmyAgt1"
    )
    intrmy_agt2: BranchAndFinancialInstitutionIdentification6 | None = Field(
        None, alias="IntrmyAgt2"
    )
    intrmy_agt3: BranchAndFinancialInstitutionIdentification6 | None = Field(
        None, alias="IntrmyAgt3"
    )
    rcvg_agt: BranchAndFinancialInstitutionIdentification6 | None = Field(None, alias="RcvgAgt")
    dlvrg_agt: BranchAndFinancialInstitutionIdentification6 | None = Field(None, alias="DlvrgAgt")
    issg_agt: BranchAndFinancialInstitutionIdentification6 | None = Field(None, alias="IssgAgt")
    sttlm_plc: BranchAndFinancialInstitutionIdentification6 | None = Field(None, alias="SttlmPlc")
    prtry: list[ProprietaryAgent4] | None = Field(None, alias="Prtry")


class ProprietaryDate3(ISOModel):
    tp: Max35Text = Field(alias="Tp")
    dt: DateAndDateTime2Choice = Field(alias="Dt")


class TransactionDates3(ISOModel):
    accptnc_dt_tm: ISODateTime | None = Field(None, alias="AccptncDtTm")
    trad_actvty_ctrctl_sttlm_dt: ISODate | None = Field(None, alias="TradActvtyCtrctlSttlmDt")
    trad_dt: ISODate | None = Field(None, alias="TradDt")
    intr_bk_sttlm_dt: ISODate | None = Field(None, alias="IntrBkSttlmDt")
    start_dt: ISODate | None = Field(None, alias="StartDt")
    end_dt: ISODate | None = Field(None, alias="EndDt")
    tx_dt_tm: ISODateTime | None = Field(None, alias="TxDtTm")
    prtry: list[ProprietaryDate3] | None = Field(None, alias="Prtry")


class InterestRecord2(ISOModel):
    amt: ActiveOrHistoricCurrencyAndAmount = Field(alias="Amt")
    cdt_dbt_ind: CreditDebitCode = Field(alias="CdtDbtInd")
    tp: InterestType1Choice | None = Field(None, alias="Tp")
    rate: Rate4 | None = Field(None, alias="Rate")
    fr_to_dt: DateTimePeriod1 | None = Field(None, alias="FrToDt")
    rsn: Max35Text | None = Field(None, alias="Rsn")
    tax: TaxCharges2 | None = Field(None, alias="Tax")


class TransactionInterest4(ISOModel):
    ttl_intrst_and_tax_amt: ActiveOrHistoricCurrencyAndAmount | None = Field(
        None, alias="TtlIntrstAndTaxAmt"
    )
    rcrd: list[InterestRecord2] | None = Field(None, alias="Rcrd")


class ProprietaryParty5(ISOModel):
    tp: Max35Text = Field(alias="Tp")
    pty: Party40Choice = Field(alias="Pty")


class TransactionParties6(ISOModel):
    initg_pty: Party40Choice | None = Field(None, alias="InitgPty")
    dbtr: Party40Choice | None = Field(None, alias="Dbtr")
    dbtr_acct: CashAccount38 | None = Field(None, alias="DbtrAcct")
    ultmt_dbtr: Party40Choice | None = Field(None, alias="UltmtDbtr")
    cdtr: Party40Choice | None = Field(None, alias="Cdtr")
    cdtr_acct: CashAccount38 | None = Field(None, alias="CdtrAcct")
    ultmt_cdtr: Party40Choice | None = Field(None, alias="UltmtCdtr")
    tradg_pty: Party40Choice | None = Field(None, alias="TradgPty")
    prtry: list[ProprietaryParty5] | None = Field(None, alias="Prtry")


class ActiveOrHistoricCurrencyAnd13DecimalAmountSimpleType(SimpleDecimal):
    min_inclusive = Decimal("0")


class ActiveOrHistoricCurrencyAnd13DecimalAmount(ISOModel):
    ccy: ActiveOrHistoricCurrencyCode = attribute("Ccy")
    value: ActiveOrHistoricCurrencyAnd13DecimalAmountSimpleType = content()


class PriceRateOrAmount3Choice(ChoiceModel):
    rate: Decimal | None = Field(None, alias="Rate")
    amt: ActiveOrHistoricCurrencyAnd13DecimalAmount | None = Field(None, alias="Amt")


class PriceValueType1Code(str, Enum):
    DISC = "DISC"
    PREM = "PREM"
    PARV = "PARV"


class YieldedOrValueType1Choice(ChoiceModel):
    yldd: bool | None = Field(None, alias="Yldd")
    val_tp: PriceValueType1Code | None = Field(None, alias="ValTp")


class Price7(ISOModel):
    tp: YieldedOrValueType1Choice = Field(alias="Tp")
    val: PriceRateOrAmount3Choice = Field(alias="Val")


class ProprietaryPrice2(ISOModel):
    tp: Max35Text = Field(alias="Tp")
    pric: ActiveOrHistoricCurrencyAndAmount = Field(alias="Pric")


class TransactionPrice4Choice(ChoiceModel):
    deal_pric: Price7 | None = Field(None, alias="DealPric")
    prtry: list[ProprietaryPrice2] | None = Field(None, alias="Prtry")


class OriginalAndCurrentQuantities1(ISOModel):
    face_amt: Decimal = Field(alias="FaceAmt")
    amtsd_val: Decimal = Field(alias="AmtsdVal")


class ProprietaryQuantity1(ISOModel):
    tp: Max35Text = Field(alias="Tp")
    qty: Max35Text = Field(alias="Qty")


class TransactionQuantities3Choice(ChoiceModel):
    qty: FinancialInstrumentQuantity1Choice | None = Field(None, alias="Qty")
    orgnl_and_cur_face_amt: OriginalAndCurrentQuantities1 | None = Field(
        None, alias="OrgnlAndCurFaceAmt"
    )
    prtry: ProprietaryQuantity1 | None = Field(None, alias="Prtry")


class EntryTransaction10(ISOModel):
    refs: TransactionReferences6 | None = Field(None, alias="Refs")
    amt: ActiveOrHistoricCurrencyAndAmount | None = Field(None, alias="Amt")
    cdt_dbt_ind: CreditDebitCode | None = Field(None, alias="CdtDbtInd")
    amt_dtls: AmountAndCurrencyExchange3 | None = Field(None, alias="AmtDtls")
    avlbty: list[CashAvailability1] | None = Field(None, alias="Avlbty")
    bk_tx_cd: BankTransactionCodeStructure4 | None = Field(None, alias="BkTxCd")
    chrgs: Charges6 | None = Field(None, alias="Chrgs")
    intrst: TransactionInterest4 | None = Field(None, alias="Intrst")
    rltd_pties: TransactionParties6 | None = Field(None, alias="RltdPties")
    rltd_agts: TransactionAgents5 | None = Field(None, alias="RltdAgts")
    lcl_instrm: LocalInstrument2Choice | None = Field(None, alias="LclInstrm")
    purp: Purpose2Choice | None = Field(None, alias="Purp")
    rltd_rmt_inf: list[RemittanceLocation7] | None = Field(None, alias="RltdRmtInf")
    rmt_inf: RemittanceInformation16 | None = Field(None, alias="RmtInf")
    rltd_dts: TransactionDates3 | None = Field(None, alias="RltdDts")
    rltd_pric: TransactionPrice4Choice | None = Field(None, alias="RltdPric")
    rltd_qties: list[TransactionQuantities3Choice] | None = Field(None, alias="RltdQties")
    fin_instrm_id: SecurityIdentification19 | None = Field(None, alias="FinInstrmId")
    tax: TaxInformation8 | None = Field(None, alias="Tax")
    rtr_inf: PaymentReturnReason5 | None = Field(None, alias="RtrInf")
    corp_actn: CorporateAction9 | None = Field(None, alias="CorpActn")
    sfkpg_acct: SecuritiesAccount19 | None = Field(None, alias="SfkpgAcct")
    csh_dpst: list[CashDeposit1] | None = Field(None, alias="CshDpst")
    card_tx: CardTransaction17 | None = Field(None, alias="CardTx")
    addtl_tx_inf: Max500Text | None = Field(None, alias="AddtlTxInf")
    splmtry_data: list[SupplementaryData1] | None = Field(None, alias="SplmtryData")


class EntryDetails9(ISOModel):
    btch: BatchInformation2 | None = Field(None, alias="Btch")
    tx_dtls: list[EntryTransaction10] | None = Field(None, alias="TxDtls")


class ExternalEntryStatus1Code(SimpleText):
    min_length = 1
    max_length = 4


class EntryStatus1Choice(ChoiceModel):
    cd: ExternalEntryStatus1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class MessageIdentification2(ISOModel):
    msg_nm_id: Max35Text | None = Field(None, alias="MsgNmId")
    msg_id: Max35Text | None = Field(None, alias="MsgId")


class ExternalTechnicalInputChannel1Code(SimpleText):
    min_length = 1
    max_length = 4


class TechnicalInputChannel1Choice(ChoiceModel):
    cd: ExternalTechnicalInputChannel1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class ReportEntry10(ISOModel):
    ntry_ref: Max35Text | None = Field(None, alias="NtryRef")
    amt: ActiveOrHistoricCurrencyAndAmount = Field(alias="Amt")
    cdt_dbt_ind: CreditDebitCode = Field(alias="CdtDbtInd")
    rvsl_ind: bool | None = Field(None, alias="RvslInd")
    sts: EntryStatus1Choice = Field(alias="Sts")
    bookg_dt: DateAndDateTime2Choice | None = Field(None, alias="BookgDt")
    val_dt: DateAndDateTime2Choice | None = Field(None, alias="ValDt")
    acct_svcr_ref: Max35Text | None = Field(None, alias="AcctSvcrRef")
    avlbty: list[CashAvailability1] | None = Field(None, alias="Avlbty")
    bk_tx_cd: BankTransactionCodeStructure4 = Field(alias="BkTxCd")
    comssn_wvr_ind: bool | None = Field(None, alias="ComssnWvrInd")
    addtl_inf_ind: MessageIdentification2 | None = Field(None, alias="AddtlInfInd")
    amt_dtls: AmountAndCurrencyExchange3 | None = Field(None, alias="AmtDtls")
    chrgs: Charges6 | None = Field(None, alias="Chrgs")
    tech_inpt_chanl: TechnicalInputChannel1Choice | None = Field(None, alias="TechInptChanl")
    intrst: TransactionInterest4 | None = Field(None, alias="Intrst")
    card_tx: CardEntry4 | None = Field(None, alias="CardTx")
    ntry_dtls: list[EntryDetails9] | None = Field(None, alias="NtryDtls")
    addtl_ntry_inf: Max500Text | None = Field(None, alias="AddtlNtryInf")


class ExternalReportingSource1Code(SimpleText):
    min_length = 1
    max_length = 4


class ReportingSource1Choice(ChoiceModel):
    cd: ExternalReportingSource1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class SequenceRange1(ISOModel):
    fr_seq: Max35Text = Field(alias="FrSeq")
    to_seq: Max35Text = Field(alias="ToSeq")


class SequenceRange1Choice(ChoiceModel):
    fr_seq: Max35Text | None = Field(None, alias="FrSeq")
    to_seq: Max35Text | None = Field(None, alias="ToSeq")
    fr_to_seq: list[SequenceRange1] | None = Field(None, alias="FrToSeq")
    eq_seq: list[Max35Text] | None = Field(None, alias="EQSeq")
    neq_seq: list[Max35Text] | None = Field(None, alias="NEQSeq")


class NumberAndSumOfTransactions1(ISOModel):
    nb_of_ntries: Max15NumericText | None = Field(None, alias="NbOfNtries")
    sum: Decimal | None = Field(None, alias="Sum")


class AmountAndDirection35(ISOModel):
    amt: Decimal = Field(alias="Amt")
    cdt_dbt_ind: CreditDebitCode = Field(alias="CdtDbtInd")


class NumberAndSumOfTransactions4(ISOModel):
    nb_of_ntries: Max15NumericText | None = Field(None, alias="NbOfNtries")
    sum: Decimal | None = Field(None, alias="Sum")
    ttl_net_ntry: AmountAndDirection35 | None = Field(None, alias="TtlNetNtry")


class TotalsPerBankTransactionCode5(ISOModel):
    nb_of_ntries: Max15NumericText | None = Field(None, alias="NbOfNtries")
    sum: Decimal | None = Field(None, alias="Sum")
    ttl_net_ntry: AmountAndDirection35 | None = Field(None, alias="TtlNetNtry")
    cdt_ntries: NumberAndSumOfTransactions1 | None = Field(None, alias="CdtNtries")
    dbt_ntries: NumberAndSumOfTransactions1 | None = Field(None, alias="DbtNtries")
    fcst_ind: bool | None = Field(None, alias="FcstInd")
    bk_tx_cd: BankTransactionCodeStructure4 = Field(alias="BkTxCd")
    avlbty: list[CashAvailability1] | None = Field(None, alias="Avlbty")
    dt: DateAndDateTime2Choice | None = Field(None, alias="Dt")


class TotalTransactions6(ISOModel):
    ttl_ntries: NumberAndSumOfTransactions4 | None = Field(None, alias="TtlNtries")
    ttl_cdt_ntries: NumberAndSumOfTransactions1 | None = Field(None, alias="TtlCdtNtries")
    ttl_dbt_ntries: NumberAndSumOfTransactions1 | None = Field(None, alias="TtlDbtNtries")
    ttl_ntries_per_bk_tx_cd: list[TotalsPerBankTransactionCode5] | None = Field(
        None, alias="TtlNtriesPerBkTxCd"
    )


class AccountNotification17(ISOModel):
    id: Max35Text = Field(alias="Id")
    ntfctn_pgntn: Pagination1 | None = Field(None, alias="NtfctnPgntn")
    elctrnc_seq_nb: Decimal | None = Field(None, alias="ElctrncSeqNb")
    rptg_seq: SequenceRange1Choice | None = Field(None, alias="RptgSeq")
    lgl_seq_nb: Decimal | None = Field(None, alias="LglSeqNb")
    cre_dt_tm: ISODateTime | None = Field(None, alias="CreDtTm")
    fr_to_dt: DateTimePeriod1 | None = Field(None, alias="FrToDt")
    cpy_dplct_ind: CopyDuplicate1Code | None = Field(None, alias="CpyDplctInd")
    rptg_src: ReportingSource1Choice | None = Field(None, alias="RptgSrc")
    acct: CashAccount39 = Field(alias="Acct")
    rltd_acct: CashAccount38 | None = Field(None, alias="RltdAcct")
    intrst: list[AccountInterest4] | None = Field(None, alias="Intrst")
    txs_summry: TotalTransactions6 | None = Field(None, alias="TxsSummry")
    ntry: list[ReportEntry10] | None = Field(None, alias="Ntry")
    addtl_ntfctn_inf: Max500Text | None = Field(None, alias="AddtlNtfctnInf")


class GroupHeader81(ISOModel):
    msg_id: Max35Text = Field(alias="MsgId")
    cre_dt_tm: ISODateTime = Field(alias="CreDtTm")
    msg_rcpt: PartyIdentification135 | None = Field(None, alias="MsgRcpt")
    msg_pgntn: Pagination1 | None = Field(None, alias="MsgPgntn")
    orgnl_biz_qry: OriginalBusinessQuery1 | None = Field(None, alias="OrgnlBizQry")
    addtl_inf: Max500Text | None = Field(None, alias="AddtlInf")


@message("camt.054.001.08", "BkToCstmrDbtCdtNtfctn")
class BankToCustomerDebitCreditNotificationV08(ISOModel):
    """Message root of camt.054.001.08, carried in the <BkToCstmrDbtCdtNtfctn> element."""

    grp_hdr: GroupHeader81 = Field(alias="GrpHdr")
    ntfctn: list[AccountNotification17] = Field(alias="Ntfctn")
    splmtry_data: list[SupplementaryData1] | None = Field(None, alias="SplmtryData")


class ISOYearMonth(SimpleText):
    """Year and month in YYYY-MM form."""


class NonNegativeDecimalNumber(SimpleDecimal):
    min_inclusive = Decimal("0")
