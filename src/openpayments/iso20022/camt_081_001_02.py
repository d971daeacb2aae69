"""
camt.081.001.02 - IntraBalanceMovementModificationReportV02

Intra-balance movement modification report, sent by an account servicer to report on requests to
modify intra-balance movements.

Only the types specific to this message are declared here; shared types come from
openpayments.iso20022.common.
"""

from enum import Enum

from pydantic import Field

from openpayments.domain.models import ChoiceModel, ISOModel
from openpayments.domain.registry import message
from openpayments.domain.types import SimpleText
from openpayments.iso20022.common import (
    ActiveCurrencyAndAmount,
    Amount2Choice,
    AnyBICDec2014Identifier,
    BranchAndFinancialInstitutionIdentification8,
    CashAccount40,
    ClearingChannel2Code,
    CopyDuplicate1Code,
    CreditDebitCode,
    DateAndDateTime2Choice,
    DateTimePeriod1,
    ErrorHandling5,
    Exact3NumericText,
    FinancialInstrumentQuantity1Choice,
    GenericIdentification30,
    GenericIdentification36,
    ISODate,
    Max210Text,
    Max350Text,
    Max35Text,
    NoReasonCode,
    Pagination1,
    PartyIdentification136,
    SupplementaryData1,
    SystemPartyIdentification8,
)


class AcknowledgementReason5Code(str, Enum):
    ADEA = "ADEA"
    SMPG = "SMPG"
    OTHR = "OTHR"
    CDCY = "CDCY"
    CDRG = "CDRG"
    CDRE = "CDRE"
    NSTP = "NSTP"
    RQWV = "RQWV"
    LATE = "LATE"


class AcknowledgementReason12Choice(ChoiceModel):
    cd: AcknowledgementReason5Code | None = Field(None, alias="Cd")
    prtry: GenericIdentification30 | None = Field(None, alias="Prtry")


class AcknowledgementReason9(ISOModel):
    cd: AcknowledgementReason12Choice = Field(alias="Cd")
    addtl_rsn_inf: Max210Text | None = Field(None, alias="AddtlRsnInf")


class AcknowledgedAcceptedStatus21Choice(ChoiceModel):
    no_spcfd_rsn: NoReasonCode | None = Field(None, alias="NoSpcfdRsn")
    rsn: list[AcknowledgementReason9] | None = Field(None, alias="Rsn")


class AmountAndDirection5(ISOModel):
    amt: ActiveCurrencyAndAmount = Field(alias="Amt")
    cdt_dbt: CreditDebitCode | None = Field(None, alias="CdtDbt")


class GenericIdentification37(ISOModel):
    id: Max35Text = Field(alias="Id")
    issr: Max35Text | None = Field(None, alias="Issr")


class AmountAndQuantityBreakdown1(ISOModel):
    lot_nb: GenericIdentification37 | None = Field(None, alias="LotNb")
    lot_amt: AmountAndDirection5 | None = Field(None, alias="LotAmt")
    lot_qty: FinancialInstrumentQuantity1Choice | None = Field(None, alias="LotQty")
    csh_sub_bal_tp: GenericIdentification30 | None = Field(None, alias="CshSubBalTp")


class ExternalBalanceType1Code(SimpleText):
    min_length = 1
    max_length = 4


class CashBalanceType3Choice(ChoiceModel):
    cd: ExternalBalanceType1Code | None = Field(None, alias="Cd")
    prtry: GenericIdentification30 | None = Field(None, alias="Prtry")


class CashSubBalanceTypeAndQuantityBreakdown3(ISOModel):
    tp: CashBalanceType3Choice = Field(alias="Tp")
    qty_brkdwn: list[AmountAndQuantityBreakdown1] | None = Field(None, alias="QtyBrkdwn")


class DeniedReason4Code(str, Enum):
    ADEA = "ADEA"
    DCAN = "DCAN"
    DPRG = "DPRG"
    DREP = "DREP"
    DSET = "DSET"
    LATE = "LATE"
    OTHR = "OTHR"
    CDRG = "CDRG"
    CDCY = "CDCY"
    CDRE = "CDRE"


class DeniedReason16Choice(ChoiceModel):
    cd: DeniedReason4Code | None = Field(None, alias="Cd")
    prtry: GenericIdentification30 | None = Field(None, alias="Prtry")


class DeniedReason11(ISOModel):
    cd: DeniedReason16Choice = Field(alias="Cd")
    addtl_rsn_inf: Max210Text | None = Field(None, alias="AddtlRsnInf")


class DeniedStatus16Choice(ChoiceModel):
    no_spcfd_rsn: NoReasonCode | None = Field(None, alias="NoSpcfdRsn")
    rsn: list[DeniedReason11] | None = Field(None, alias="Rsn")


class DocumentIdentification51(ISOModel):
    id: Max35Text = Field(alias="Id")
    cre_dt_tm: DateAndDateTime2Choice | None = Field(None, alias="CreDtTm")
    cpy_dplct: CopyDuplicate1Code | None = Field(None, alias="CpyDplct")
    msg_orgtr: PartyIdentification136 | None = Field(None, alias="MsgOrgtr")
    msg_rcpt: PartyIdentification136 | None = Field(None, alias="MsgRcpt")


class ISO20022MessageIdentificationText(SimpleText):
    pattern = r"[a-z]{4}\.[0-9]{3}\.[0-9]{3}\.[0-9]{2}"


class DocumentNumber5Choice(ChoiceModel):
    shrt_nb: Exact3NumericText | None = Field(None, alias="ShrtNb")
    lng_nb: ISO20022MessageIdentificationText | None = Field(None, alias="LngNb")
    prtry_nb: GenericIdentification36 | None = Field(None, alias="PrtryNb")


class EventFrequency7Code(str, Enum):
    YEAR = "YEAR"
    ADHO = "ADHO"
    MNTH = "MNTH"
    DAIL = "DAIL"
    INDA = "INDA"
    WEEK = "WEEK"
    SEMI = "SEMI"
    QUTR = "QUTR"
    TOMN = "TOMN"
    TOWK = "TOWK"
    TWMN = "TWMN"
    OVNG = "OVNG"
    ONDE = "ONDE"


class Exact4NumericText(SimpleText):
    pattern = r"[0-9]{4}"


class Exact5NumericText(SimpleText):
    pattern = r"[0-9]{5}"


class Frequency22Choice(ChoiceModel):
    cd: EventFrequency7Code | None = Field(None, alias="Cd")
    prtry: GenericIdentification30 | None = Field(None, alias="Prtry")


class PriorityNumeric4Choice(ChoiceModel):
    nmrc: Exact4NumericText | None = Field(None, alias="Nmrc")
    prtry: GenericIdentification30 | None = Field(None, alias="Prtry")


class IntraBalance5(ISOModel):
    sttlm_amt: Amount2Choice = Field(alias="SttlmAmt")
    sttlm_dt: DateAndDateTime2Choice = Field(alias="SttlmDt")
    bal_fr: CashSubBalanceTypeAndQuantityBreakdown3 = Field(alias="BalFr")
    bal_to: CashSubBalanceTypeAndQuantityBreakdown3 = Field(alias="BalTo")
    csh_sub_bal_id: GenericIdentification37 | None = Field(None, alias="CshSubBalId")
    prty: PriorityNumeric4Choice | None = Field(None, alias="Prty")
    instr_prcg_addtl_dtls: Max350Text | None = Field(None, alias="InstrPrcgAddtlDtls")


class PendingReason6Code(str, Enum):
    ADEA = "ADEA"
    CONF = "CONF"
    OTHR = "OTHR"
    CDRG = "CDRG"
    CDCY = "CDCY"
    CDRE = "CDRE"


class PendingReason28Choice(ChoiceModel):
    cd: PendingReason6Code | None = Field(None, alias="Cd")
    prtry: GenericIdentification30 | None = Field(None, alias="Prtry")


class PendingReason16(ISOModel):
    cd: PendingReason28Choice = Field(alias="Cd")
    addtl_rsn_inf: Max210Text | None = Field(None, alias="AddtlRsnInf")


class PendingStatus38Choice(ChoiceModel):
    no_spcfd_rsn: NoReasonCode | None = Field(None, alias="NoSpcfdRsn")
    rsn: list[PendingReason16] | None = Field(None, alias="Rsn")


class ProprietaryReason4(ISOModel):
    rsn: GenericIdentification30 | None = Field(None, alias="Rsn")
    addtl_rsn_inf: Max210Text | None = Field(None, alias="AddtlRsnInf")


class ProprietaryStatusAndReason6(ISOModel):
    prtry_sts: GenericIdentification30 = Field(alias="PrtrySts")
    prtry_rsn: list[ProprietaryReason4] | None = Field(None, alias="PrtryRsn")


class RejectionReason34Code(str, Enum):
    ADEA = "ADEA"
    LATE = "LATE"
    CASH = "CASH"
    NRGM = "NRGM"
    NRGN = "NRGN"
    OTHR = "OTHR"
    REFE = "REFE"


class RejectionAndRepairReason33Choice(ChoiceModel):
    cd: RejectionReason34Code | None = Field(None, alias="Cd")
    prtry: GenericIdentification30 | None = Field(None, alias="Prtry")


class RejectionOrRepairReason33(ISOModel):
    cd: RejectionAndRepairReason33Choice = Field(alias="Cd")
    addtl_rsn_inf: Max210Text | None = Field(None, alias="AddtlRsnInf")


class RejectionOrRepairStatus39Choice(ChoiceModel):
    no_spcfd_rsn: NoReasonCode | None = Field(None, alias="NoSpcfdRsn")
    rsn: list[RejectionOrRepairReason33] | None = Field(None, alias="Rsn")


class RejectionReason35Code(str, Enum):
    CASH = "CASH"
    ADEA = "ADEA"
    REFE = "REFE"
    LATE = "LATE"
    DDAT = "DDAT"
    NRGN = "NRGN"
    OTHR = "OTHR"
    INVM = "INVM"
    INVL = "INVL"


class RejectionAndRepairReason34Choice(ChoiceModel):
    cd: RejectionReason35Code | None = Field(None, alias="Cd")
    prtry: GenericIdentification30 | None = Field(None, alias="Prtry")


class RejectionOrRepairReason34(ISOModel):
    cd: RejectionAndRepairReason34Choice = Field(alias="Cd")
    addtl_rsn_inf: Max210Text | None = Field(None, alias="AddtlRsnInf")


class RejectionOrRepairStatus40Choice(ChoiceModel):
    no_spcfd_rsn: NoReasonCode | None = Field(None, alias="NoSpcfdRsn")
    rsn: list[RejectionOrRepairReason34] | None = Field(None, alias="Rsn")


class ProcessingStatus71Choice(ChoiceModel):
    ackd_accptd: AcknowledgedAcceptedStatus21Choice | None = Field(None, alias="AckdAccptd")
    pdg: PendingStatus38Choice | None = Field(None, alias="Pdg")
    rjctd: RejectionOrRepairStatus40Choice | None = Field(None, alias="Rjctd")
    rpr: RejectionOrRepairStatus39Choice | None = Field(None, alias="Rpr")
    dnd: DeniedStatus16Choice | None = Field(None, alias="Dnd")
    cmpltd: ProprietaryReason4 | None = Field(None, alias="Cmpltd")
    prtry: ProprietaryStatusAndReason6 | None = Field(None, alias="Prtry")


class PartyIdentification127Choice(ChoiceModel):
    any_bic: AnyBICDec2014Identifier | None = Field(None, alias="AnyBIC")
    prtry_id: GenericIdentification36 | None = Field(None, alias="PrtryId")


class ProcessingPosition3Code(str, Enum):
    AFTE = "AFTE"
    WITH = "WITH"
    BEFO = "BEFO"
    INFO = "INFO"


class ProcessingPosition7Choice(ChoiceModel):
    cd: ProcessingPosition3Code | None = Field(None, alias="Cd")
    prtry: GenericIdentification30 | None = Field(None, alias="Prtry")


class References34Choice(ChoiceModel):
    scties_sttlm_tx_id: Max35Text | None = Field(None, alias="SctiesSttlmTxId")
    intra_pos_mvmnt_id: Max35Text | None = Field(None, alias="IntraPosMvmntId")
    intra_bal_mvmnt_id: Max35Text | None = Field(None, alias="IntraBalMvmntId")
    acct_svcr_tx_id: Max35Text | None = Field(None, alias="AcctSvcrTxId")
    mkt_infrstrctr_tx_id: Max35Text | None = Field(None, alias="MktInfrstrctrTxId")
    pool_id: Max35Text | None = Field(None, alias="PoolId")
    othr_tx_id: Max35Text | None = Field(None, alias="OthrTxId")


class Linkages57(ISOModel):
    prcg_pos: ProcessingPosition7Choice | None = Field(None, alias="PrcgPos")
    msg_nb: DocumentNumber5Choice | None = Field(None, alias="MsgNb")
    ref: References34Choice = Field(alias="Ref")
    ref_ownr: PartyIdentification127Choice | None = Field(None, alias="RefOwnr")


class LinkageType1Code(str, Enum):
    LINK = "LINK"
    UNLK = "UNLK"
    SOFT = "SOFT"


class LinkageType3Choice(ChoiceModel):
    cd: LinkageType1Code | None = Field(None, alias="Cd")
    prtry: GenericIdentification30 | None = Field(None, alias="Prtry")


class References14(ISOModel):
    acct_ownr_tx_id: Max35Text | None = Field(None, alias="AcctOwnrTxId")
    acct_svcr_tx_id: Max35Text | None = Field(None, alias="AcctSvcrTxId")
    mkt_infrstrctr_tx_id: Max35Text | None = Field(None, alias="MktInfrstrctrTxId")
    prcr_tx_id: Max35Text | None = Field(None, alias="PrcrTxId")
    pool_id: Max35Text | None = Field(None, alias="PoolId")


class RequestDetails22(ISOModel):
    ref: References14 = Field(alias="Ref")
    lkg: LinkageType3Choice | None = Field(None, alias="Lkg")
    prty: PriorityNumeric4Choice | None = Field(None, alias="Prty")
    othr_prcg: list[GenericIdentification30] | None = Field(None, alias="OthrPrcg")
    prtl_sttlm_ind: bool | None = Field(None, alias="PrtlSttlmInd")
    clr_chanl: ClearingChannel2Code | None = Field(None, alias="ClrChanl")
    lnkgs: list[Linkages57] | None = Field(None, alias="Lnkgs")


class IntraBalanceModification8(ISOModel):
    csh_acct: CashAccount40 | None = Field(None, alias="CshAcct")
    csh_acct_ownr: SystemPartyIdentification8 | None = Field(None, alias="CshAcctOwnr")
    csh_acct_svcr: BranchAndFinancialInstitutionIdentification8 | None = Field(
        None, alias="CshAcctSvcr"
    )
    prcg_sts: ProcessingStatus71Choice | None = Field(None, alias="PrcgSts")
    req_ref: Max35Text = Field(alias="ReqRef")
    sts_dt: ISODate | None = Field(None, alias="StsDt")
    req_dtls: RequestDetails22 | None = Field(None, alias="ReqDtls")
    undrlyg_intra_bal: IntraBalance5 | None = Field(None, alias="UndrlygIntraBal")


class IntraBalanceModification7(ISOModel):
    csh_acct: CashAccount40 | None = Field(None, alias="CshAcct")
    csh_acct_ownr: SystemPartyIdentification8 | None = Field(None, alias="CshAcctOwnr")
    csh_acct_svcr: BranchAndFinancialInstitutionIdentification8 | None = Field(
        None, alias="CshAcctSvcr"
    )
    prcg_sts: ProcessingStatus71Choice | None = Field(None, alias="PrcgSts")
    mod: list[IntraBalanceModification8] = Field(alias="Mod")


class IntraBalanceOrOperationalError12Choice(ChoiceModel):
    mods: list[IntraBalanceModification7] | None = Field(None, alias="Mods")
    oprl_err: list[ErrorHandling5] | None = Field(None, alias="OprlErr")


class MovementResponseType1Code(str, Enum):
    FULL = "FULL"
    STTS = "STTS"


class Number3Choice(ChoiceModel):
    shrt: Exact3NumericText | None = Field(None, alias="Shrt")
    lng: Exact5NumericText | None = Field(None, alias="Lng")


class Period2(ISOModel):
    fr_dt: ISODate = Field(alias="FrDt")
    to_dt: ISODate = Field(alias="ToDt")


class Period7Choice(ChoiceModel):
    fr_dt_tm_to_dt_tm: DateTimePeriod1 | None = Field(None, alias="FrDtTmToDtTm")
    fr_dt_to_dt: Period2 | None = Field(None, alias="FrDtToDt")


class StatementUpdateType1Code(str, Enum):
    COMP = "COMP"
    DELT = "DELT"


class UpdateType15Choice(ChoiceModel):
    cd: StatementUpdateType1Code | None = Field(None, alias="Cd")
    prtry: GenericIdentification30 | None = Field(None, alias="Prtry")


class IntraBalanceReport5(ISOModel):
    rpt_nb: Number3Choice | None = Field(None, alias="RptNb")
    qry_ref: Max35Text | None = Field(None, alias="QryRef")
    rpt_id: Max35Text | None = Field(None, alias="RptId")
    rpt_dt_tm: DateAndDateTime2Choice | None = Field(None, alias="RptDtTm")
    rpt_prd: Period7Choice | None = Field(None, alias="RptPrd")
    qry_tp: MovementResponseType1Code | None = Field(None, alias="QryTp")
    frqcy: Frequency22Choice | None = Field(None, alias="Frqcy")
    upd_tp: UpdateType15Choice = Field(alias="UpdTp")
    actvty_ind: bool = Field(alias="ActvtyInd")


@message("camt.081.001.02", "IntraBalMvmntModRpt")
class IntraBalanceMovementModificationReportV02(ISOModel):
    """Message root of camt.081.001.02, carried in the <IntraBalMvmntModRpt> element."""

    id: DocumentIdentification51 | None = Field(None, alias="Id")
    pgntn: Pagination1 = Field(alias="Pgntn")
    rpt_gnl_dtls: IntraBalanceReport5 = Field(alias="RptGnlDtls")
    rpt_or_err: IntraBalanceOrOperationalError12Choice | None = Field(None, alias="RptOrErr")
    splmtry_data: list[SupplementaryData1] | None = Field(None, alias="SplmtryData")
