"""
camt.006.001.11 - ReturnTransactionV11

Return transaction, sent by the transaction administrator to a member of the system with the
transactions matching a transaction query.

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
    ActiveCurrencyAndAmount,
    ActiveOrHistoricCurrencyAndAmount,
    ActiveOrHistoricCurrencyCode,
    Amount2Choice,
    BranchAndFinancialInstitutionIdentification8,
    CashAccountType2Choice,
    CountryCode,
    CreditDebitCode,
    DateAndDateTime2Choice,
    DateTimePeriod1,
    ErrorHandling5,
    ISODate,
    ISODateTime,
    Max10Text,
    Max140Text,
    Max15NumericText,
    Max16Text,
    Max256Text,
    Max35Text,
    Max3NumericText,
    Max4AlphaNumericText,
    Max70Text,
    OriginalBusinessQuery1,
    Pagination1,
    PartyIdentification272,
    ProxyAccountIdentification1,
    RequestType4Choice,
    SupplementaryData1,
    UUIDv4Identifier,
)


class Amount3Choice(ChoiceModel):
    amt_wth_ccy: ActiveOrHistoricCurrencyAndAmount | None = Field(None, alias="AmtWthCcy")
    amt_wtht_ccy: Decimal | None = Field(None, alias="AmtWthtCcy")


class CancelledStatusReason1Code(str, Enum):
    CANI = "CANI"
    CANS = "CANS"
    CSUB = "CSUB"


class CashAccount43(ISOModel):
    id: AccountIdentification4Choice | None = Field(None, alias="Id")
    tp: CashAccountType2Choice | None = Field(None, alias="Tp")
    ccy: ActiveOrHistoricCurrencyCode | None = Field(None, alias="Ccy")
    nm: Max70Text | None = Field(None, alias="Nm")
    prxy: ProxyAccountIdentification1 | None = Field(None, alias="Prxy")
    ownr: PartyIdentification272 | None = Field(None, alias="Ownr")
    svcr: BranchAndFinancialInstitutionIdentification8 | None = Field(None, alias="Svcr")


class EntryStatus1Code(str, Enum):
    BOOK = "BOOK"
    PDNG = "PDNG"
    FUTR = "FUTR"


class CashEntry2(ISOModel):
    amt: ActiveCurrencyAndAmount | None = Field(None, alias="Amt")
    dt: DateAndDateTime2Choice | None = Field(None, alias="Dt")
    sts: EntryStatus1Code | None = Field(None, alias="Sts")
    id: Max35Text | None = Field(None, alias="Id")
    stmt_id: Max35Text | None = Field(None, alias="StmtId")
    acct_svcr_ref: Decimal | None = Field(None, alias="AcctSvcrRef")
    addtl_ntry_inf: list[Max140Text] | None = Field(None, alias="AddtlNtryInf")


class CashAccountAndEntry5(ISOModel):
    acct: CashAccount43 = Field(alias="Acct")
    ntry: CashEntry2 | None = Field(None, alias="Ntry")


class DateTimePeriod1Choice(ChoiceModel):
    fr_dt_tm: ISODateTime | None = Field(None, alias="FrDtTm")
    to_dt_tm: ISODateTime | None = Field(None, alias="ToDtTm")
    dt_tm_rg: DateTimePeriod1 | None = Field(None, alias="DtTmRg")


class EntryTypeIdentifier(SimpleText):
    pattern = r"[BEOVW]{1,1}[0-9]{2,2}|DUM"


class ExternalMarketInfrastructure1Code(SimpleText):
    min_length = 1
    max_length = 3


class FinalStatus1Code(str, Enum):
    STLD = "STLD"
    RJTD = "RJTD"
    CAND = "CAND"
    FNLD = "FNLD"


class PaymentInstrument1Code(str, Enum):
    BDT = "BDT"
    BCT = "BCT"
    CDT = "CDT"
    CCT = "CCT"
    CHK = "CHK"
    BKT = "BKT"
    DCP = "DCP"
    CCP = "CCP"
    RTI = "RTI"
    CAN = "CAN"


class PaymentOrigin1Choice(ChoiceModel):
    finmt: Max3NumericText | None = Field(None, alias="FINMT")
    xml_msg_nm: Max35Text | None = Field(None, alias="XMLMsgNm")
    prtry: Max35Text | None = Field(None, alias="Prtry")
    instrm: PaymentInstrument1Code | None = Field(None, alias="Instrm")


class LongPaymentIdentification4(ISOModel):
    tx_id: Max35Text | None = Field(None, alias="TxId")
    uetr: UUIDv4Identifier | None = Field(None, alias="UETR")
    intr_bk_sttlm_amt: Decimal = Field(alias="IntrBkSttlmAmt")
    intr_bk_sttlm_dt: ISODate = Field(alias="IntrBkSttlmDt")
    pmt_mtd: PaymentOrigin1Choice | None = Field(None, alias="PmtMtd")
    instg_agt: BranchAndFinancialInstitutionIdentification8 = Field(alias="InstgAgt")
    instd_agt: BranchAndFinancialInstitutionIdentification8 = Field(alias="InstdAgt")
    ntry_tp: EntryTypeIdentifier | None = Field(None, alias="NtryTp")
    end_to_end_id: Max35Text | None = Field(None, alias="EndToEndId")


class MarketInfrastructureIdentification1Choice(ChoiceModel):
    cd: ExternalMarketInfrastructure1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class Max20000Text(SimpleText):
    min_length = 1
    max_length = 20000


class MessageHeader8(ISOModel):
    msg_id: Max35Text = Field(alias="MsgId")
    cre_dt_tm: ISODateTime | None = Field(None, alias="CreDtTm")
    msg_pgntn: Pagination1 | None = Field(None, alias="MsgPgntn")
    orgnl_biz_qry: OriginalBusinessQuery1 | None = Field(None, alias="OrgnlBizQry")
    req_tp: RequestType4Choice | None = Field(None, alias="ReqTp")
    qry_nm: Max35Text | None = Field(None, alias="QryNm")


class NumberAndSumOfTransactions2(ISOModel):
    nb_of_ntries: Max15NumericText | None = Field(None, alias="NbOfNtries")
    sum: Decimal | None = Field(None, alias="Sum")
    ttl_net_ntry_amt: Decimal | None = Field(None, alias="TtlNetNtryAmt")
    cdt_dbt_ind: CreditDebitCode | None = Field(None, alias="CdtDbtInd")


class Party50Choice(ChoiceModel):
    pty: PartyIdentification272 | None = Field(None, alias="Pty")
    agt: BranchAndFinancialInstitutionIdentification8 | None = Field(None, alias="Agt")


class PendingStatus4Code(str, Enum):
    ACPD = "ACPD"
    VALD = "VALD"
    MATD = "MATD"
    AUTD = "AUTD"
    INVD = "INVD"
    UMAC = "UMAC"
    STLE = "STLE"
    STLM = "STLM"
    SSPD = "SSPD"
    PCAN = "PCAN"
    PSTL = "PSTL"
    PFST = "PFST"
    SMLR = "SMLR"
    RMLR = "RMLR"
    SRBL = "SRBL"
    AVLB = "AVLB"
    SRML = "SRML"


class PaymentStatusCode6Choice(ChoiceModel):
    pdg: PendingStatus4Code | None = Field(None, alias="Pdg")
    fnl: FinalStatus1Code | None = Field(None, alias="Fnl")
    rtgs: Max4AlphaNumericText | None = Field(None, alias="RTGS")
    sttlm: Max4AlphaNumericText | None = Field(None, alias="Sttlm")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class PendingFailingSettlement1Code(str, Enum):
    AWMO = "AWMO"
    AWSH = "AWSH"
    LAAW = "LAAW"
    DOCY = "DOCY"
    CLAT = "CLAT"
    CERT = "CERT"
    MINO = "MINO"
    PHSE = "PHSE"
    SBLO = "SBLO"
    DKNY = "DKNY"
    STCD = "STCD"
    BENO = "BENO"
    LACK = "LACK"
    LATE = "LATE"
    CANR = "CANR"
    MLAT = "MLAT"
    OBJT = "OBJT"
    DOCC = "DOCC"
    BLOC = "BLOC"
    CHAS = "CHAS"
    NEWI = "NEWI"
    CLAC = "CLAC"
    PART = "PART"
    CMON = "CMON"
    COLL = "COLL"
    DEPO = "DEPO"
    FLIM = "FLIM"
    NOFX = "NOFX"
    INCA = "INCA"
    LINK = "LINK"
    BYIY = "BYIY"
    CAIS = "CAIS"
    LALO = "LALO"
    MONY = "MONY"
    NCON = "NCON"
    YCOL = "YCOL"
    REFS = "REFS"
    SDUT = "SDUT"
    CYCL = "CYCL"
    BATC = "BATC"
    GUAD = "GUAD"
    PREA = "PREA"
    GLOB = "GLOB"
    CPEC = "CPEC"
    MUNO = "MUNO"


class PendingSettlement2Code(str, Enum):
    AWMO = "AWMO"
    CAIS = "CAIS"
    REFU = "REFU"
    AWSH = "AWSH"
    PHSE = "PHSE"
    TAMM = "TAMM"
    DOCY = "DOCY"
    DOCC = "DOCC"
    BLOC = "BLOC"
    CHAS = "CHAS"
    NEWI = "NEWI"
    CLAC = "CLAC"
    MUNO = "MUNO"
    GLOB = "GLOB"
    PREA = "PREA"
    GUAD = "GUAD"
    PART = "PART"
    NMAS = "NMAS"
    CMON = "CMON"
    YCOL = "YCOL"
    COLL = "COLL"
    DEPO = "DEPO"
    FLIM = "FLIM"
    NOFX = "NOFX"
    INCA = "INCA"
    LINK = "LINK"
    FUTU = "FUTU"
    LACK = "LACK"
    LALO = "LALO"
    MONY = "MONY"
    NCON = "NCON"
    REFS = "REFS"
    SDUT = "SDUT"
    BATC = "BATC"
    CYCL = "CYCL"
    SBLO = "SBLO"
    CPEC = "CPEC"
    MINO = "MINO"
    PCAP = "PCAP"


class ProprietaryStatusJustification2(ISOModel):
    prtry_sts_rsn: Max4AlphaNumericText = Field(alias="PrtryStsRsn")
    rsn: Max256Text = Field(alias="Rsn")


class SuspendedStatusReason1Code(str, Enum):
    SUBY = "SUBY"
    SUBS = "SUBS"


class UnmatchedStatusReason1Code(str, Enum):
    CMIS = "CMIS"
    DDAT = "DDAT"
    DELN = "DELN"
    DEPT = "DEPT"
    DMON = "DMON"
    DDEA = "DDEA"
    DQUA = "DQUA"
    CADE = "CADE"
    SETR = "SETR"
    DSEC = "DSEC"
    VASU = "VASU"
    DTRA = "DTRA"
    RSPR = "RSPR"
    REPO = "REPO"
    CLAT = "CLAT"
    RERT = "RERT"
    REPA = "REPA"
    REPP = "REPP"
    PHYS = "PHYS"
    IIND = "IIND"
    FRAP = "FRAP"
    PLCE = "PLCE"
    PODU = "PODU"
    FORF = "FORF"
    REGD = "REGD"
    RTGS = "RTGS"
    ICAG = "ICAG"
    CPCA = "CPCA"
    CHAR = "CHAR"
    IEXE = "IEXE"
    NCRR = "NCRR"
    NMAS = "NMAS"
    SAFE = "SAFE"
    DTRD = "DTRD"
    LATE = "LATE"
    TERM = "TERM"
    ICUS = "ICUS"


class PaymentStatusReason1Choice(ChoiceModel):
    umtchd: UnmatchedStatusReason1Code | None = Field(None, alias="Umtchd")
    canc: CancelledStatusReason1Code | None = Field(None, alias="Canc")
    sspd: SuspendedStatusReason1Code | None = Field(None, alias="Sspd")
    pdg_flng_sttlm: PendingFailingSettlement1Code | None = Field(None, alias="PdgFlngSttlm")
    pdg_sttlm: PendingSettlement2Code | None = Field(None, alias="PdgSttlm")
    prtry_rjctn: ProprietaryStatusJustification2 | None = Field(None, alias="PrtryRjctn")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class PaymentStatus6(ISOModel):
    cd: PaymentStatusCode6Choice | None = Field(None, alias="Cd")
    dt_tm: DateAndDateTime2Choice | None = Field(None, alias="DtTm")
    rsn: list[PaymentStatusReason1Choice] | None = Field(None, alias="Rsn")


class System3(ISOModel):
    sys_id: MarketInfrastructureIdentification1Choice | None = Field(None, alias="SysId")
    mmb_id: BranchAndFinancialInstitutionIdentification8 | None = Field(None, alias="MmbId")
    ctry: CountryCode | None = Field(None, alias="Ctry")
    acct_id: AccountIdentification4Choice | None = Field(None, alias="AcctId")


class PaymentCommon6(ISOModel):
    pmt_fr: System3 | None = Field(None, alias="PmtFr")
    pmt_to: System3 | None = Field(None, alias="PmtTo")
    cmon_sts: list[PaymentStatus6] | None = Field(None, alias="CmonSts")
    reqd_exctn_dt: DateAndDateTime2Choice | None = Field(None, alias="ReqdExctnDt")
    ntry_dt: DateAndDateTime2Choice | None = Field(None, alias="NtryDt")
    cdt_dbt_ind: CreditDebitCode | None = Field(None, alias="CdtDbtInd")
    pmt_mtd: PaymentOrigin1Choice | None = Field(None, alias="PmtMtd")


class QueueTransactionIdentification1(ISOModel):
    q_id: Max16Text = Field(alias="QId")
    pos_in_q: Max16Text = Field(alias="PosInQ")


class ShortPaymentIdentification4(ISOModel):
    tx_id: Max35Text | None = Field(None, alias="TxId")
    uetr: UUIDv4Identifier | None = Field(None, alias="UETR")
    intr_bk_sttlm_dt: ISODate = Field(alias="IntrBkSttlmDt")
    instg_agt: BranchAndFinancialInstitutionIdentification8 = Field(alias="InstgAgt")


class PaymentIdentification8Choice(ChoiceModel):
    tx_id: Max35Text | None = Field(None, alias="TxId")
    uetr: UUIDv4Identifier | None = Field(None, alias="UETR")
    q_id: QueueTransactionIdentification1 | None = Field(None, alias="QId")
    lng_biz_id: LongPaymentIdentification4 | None = Field(None, alias="LngBizId")
    shrt_biz_id: ShortPaymentIdentification4 | None = Field(None, alias="ShrtBizId")
    prtry_id: Max70Text | None = Field(None, alias="PrtryId")


class PaymentTransactionParty4(ISOModel):
    instg_agt: BranchAndFinancialInstitutionIdentification8 | None = Field(None, alias="InstgAgt")
    instd_agt: BranchAndFinancialInstitutionIdentification8 | None = Field(None, alias="InstdAgt")
    ultmt_dbtr: Party50Choice | None = Field(None, alias="UltmtDbtr")
    dbtr: Party50Choice | None = Field(None, alias="Dbtr")
    dbtr_agt: BranchAndFinancialInstitutionIdentification8 | None = Field(None, alias="DbtrAgt")
    instg_rmbrsmnt_agt: BranchAndFinancialInstitutionIdentification8 | None = Field(
        None, alias="InstgRmbrsmntAgt"
    )
    instd_rmbrsmnt_agt: BranchAndFinancialInstitutionIdentification8 | None = Field(
        None, alias="InstdRmbrsmntAgt"
    )
    intrmy_agt1: BranchAndFinancialInstitutionIdentification8 | None = Field(
        None, alias="IntrmyAgt1"
    )
    intrmy_agt2: BranchAndFinancialInstitutionIdentification8 | None = Field(
        None, alias="IntrmyAgt2"
    )
    intrmy_agt3: BranchAndFinancialInstitutionIdentification8 | None = Field(
        None, alias="IntrmyAgt3"
    )
    cdtr_agt: BranchAndFinancialInstitutionIdentification8 | None = Field(None, alias="CdtrAgt")
    cdtr: Party50Choice | None = Field(None, alias="Cdtr")
    ultmt_cdtr: Party50Choice | None = Field(None, alias="UltmtCdtr")


class PaymentType3Code(str, Enum):
    CBS = "CBS"
    BCK = "BCK"
    BAL = "BAL"
    CLS = "CLS"
    CTR = "CTR"
    CBH = "CBH"
    CBP = "CBP"
    DPG = "DPG"
    DPN = "DPN"
    EXP = "EXP"
    TCH = "TCH"
    LMT = "LMT"
    LIQ = "LIQ"
    DPP = "DPP"
    DPH = "DPH"
    DPS = "DPS"
    STF = "STF"
    TRP = "TRP"
    TCS = "TCS"
    LOA = "LOA"
    LOR = "LOR"
    TCP = "TCP"
    OND = "OND"
    MGL = "MGL"


class PaymentType4Choice(ChoiceModel):
    cd: PaymentType3Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class Priority5Code(str, Enum):
    HIGH = "HIGH"
    LOWW = "LOWW"
    NORM = "NORM"
    URGT = "URGT"


class Priority1Choice(ChoiceModel):
    cd: Priority5Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class PaymentInstruction47(ISOModel):
    msg_id: Max35Text | None = Field(None, alias="MsgId")
    reqd_exctn_dt: DateAndDateTime2Choice | None = Field(None, alias="ReqdExctnDt")
    sts: list[PaymentStatus6] | None = Field(None, alias="Sts")
    instd_amt: Amount3Choice | None = Field(None, alias="InstdAmt")
    intr_bk_sttlm_amt: Amount2Choice | None = Field(None, alias="IntrBkSttlmAmt")
    purp: Max10Text | None = Field(None, alias="Purp")
    pmt_mtd: PaymentOrigin1Choice | None = Field(None, alias="PmtMtd")
    prty: Priority1Choice | None = Field(None, alias="Prty")
    prcg_vldty_tm: DateTimePeriod1Choice | None = Field(None, alias="PrcgVldtyTm")
    instr_cpy: Max20000Text | None = Field(None, alias="InstrCpy")
    tp: PaymentType4Choice | None = Field(None, alias="Tp")
    gnrtd_ordr: bool | None = Field(None, alias="GnrtdOrdr")
    tx_id: Max35Text | None = Field(None, alias="TxId")
    intr_bk_sttlm_dt: ISODate | None = Field(None, alias="IntrBkSttlmDt")
    end_to_end_id: Max35Text | None = Field(None, alias="EndToEndId")
    pties: PaymentTransactionParty4 | None = Field(None, alias="Pties")


class SecuritiesTransactionReferences1(ISOModel):
    acct_ownr_tx_id: Max35Text | None = Field(None, alias="AcctOwnrTxId")
    acct_svcr_tx_id: Max35Text | None = Field(None, alias="AcctSvcrTxId")
    mkt_infrstrctr_tx_id: Max35Text | None = Field(None, alias="MktInfrstrctrTxId")
    prcg_id: Max35Text | None = Field(None, alias="PrcgId")


class Transaction159(ISOModel):
    pmt_to: System3 | None = Field(None, alias="PmtTo")
    pmt_fr: System3 | None = Field(None, alias="PmtFr")
    cdt_dbt_ind: CreditDebitCode | None = Field(None, alias="CdtDbtInd")
    pmt: PaymentInstruction47 | None = Field(None, alias="Pmt")
    acct_ntry: CashAccountAndEntry5 | None = Field(None, alias="AcctNtry")
    scties_tx_refs: SecuritiesTransactionReferences1 | None = Field(None, alias="SctiesTxRefs")


class TransactionOrError6Choice(ChoiceModel):
    tx: Transaction159 | None = Field(None, alias="Tx")
    biz_err: list[ErrorHandling5] | None = Field(None, alias="BizErr")


class TransactionReport8(ISOModel):
    pmt_id: PaymentIdentification8Choice = Field(alias="PmtId")
    tx_or_err: TransactionOrError6Choice = Field(alias="TxOrErr")


class Transactions11(ISOModel):
    pmt_cmon_inf: PaymentCommon6 | None = Field(None, alias="PmtCmonInf")
    txs_summry: NumberAndSumOfTransactions2 | None = Field(None, alias="TxsSummry")
    tx_rpt: list[TransactionReport8] = Field(alias="TxRpt")


class TransactionReportOrError7Choice(ChoiceModel):
    biz_rpt: Transactions11 | None = Field(None, alias="BizRpt")
    oprl_err: list[ErrorHandling5] | None = Field(None, alias="OprlErr")


@message("camt.006.001.11", "RtrTx")
class ReturnTransactionV11(ISOModel):
    """Message root of camt.006.001.11, carried in the <RtrTx> element."""

    msg_hdr: MessageHeader8 = Field(alias="MsgHdr")
    rpt_or_err: TransactionReportOrError7Choice = Field(alias="RptOrErr")
    splmtry_data: list[SupplementaryData1] | None = Field(None, alias="SplmtryData")
