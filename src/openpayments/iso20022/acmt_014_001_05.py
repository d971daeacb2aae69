"""
acmt.014.001.05 - AccountReportV05

Account report, sent by an account servicer to report on the opening, maintenance or closing of
accounts.

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
    ActiveCurrencyCode,
    BankTransactionCodeStructure4,
    BranchAndFinancialInstitutionIdentification8,
    CashAccount40,
    CashAccountType2Choice,
    Contact13,
    CountryCode,
    ISODate,
    Max10KBinary,
    Max140Text,
    Max15PlusSignedNumericText,
    Max350Text,
    Max35Text,
    Max3NumericText,
    Max4AlphaNumericText,
    Max5NumericText,
    Max6Text,
    Max70Text,
    MessageIdentification1,
    OrganisationIdentification39,
    PartyIdentification272,
    PersonIdentification18,
    PostalAddress27,
    Restriction1,
    SkipPayload,
    SupplementaryData1,
)


class AccountContract3(ISOModel):
    trgt_go_live_dt: ISODate | None = Field(None, alias="TrgtGoLiveDt")
    trgt_clsg_dt: ISODate | None = Field(None, alias="TrgtClsgDt")
    go_live_dt: ISODate | None = Field(None, alias="GoLiveDt")
    clsg_dt: ISODate | None = Field(None, alias="ClsgDt")
    urgcy_flg: bool | None = Field(None, alias="UrgcyFlg")
    rmvl_ind: bool | None = Field(None, alias="RmvlInd")


class AccountForAction1(ISOModel):
    id: AccountIdentification4Choice = Field(alias="Id")
    ccy: ActiveCurrencyCode = Field(alias="Ccy")


class ContractDocument1(ISOModel):
    ref: Max35Text = Field(alias="Ref")
    sgn_off_dt: ISODate | None = Field(None, alias="SgnOffDt")
    vrsn: Max6Text | None = Field(None, alias="Vrsn")


class AccountStatus3Code(str, Enum):
    ENAB = "ENAB"
    DISA = "DISA"
    DELE = "DELE"
    FORM = "FORM"


class ExternalCommunicationFormat1Code(SimpleText):
    min_length = 1
    max_length = 4


class CommunicationFormat1Choice(ChoiceModel):
    cd: ExternalCommunicationFormat1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class CommunicationMethod2Code(str, Enum):
    EMAL = "EMAL"
    FAXI = "FAXI"
    FILE = "FILE"
    ONLI = "ONLI"
    POST = "POST"


class CommunicationMethod2Choice(ChoiceModel):
    cd: CommunicationMethod2Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class Frequency7Code(str, Enum):
    YEAR = "YEAR"
    DAIL = "DAIL"
    MNTH = "MNTH"
    QURT = "QURT"
    MIAN = "MIAN"
    TEND = "TEND"
    MOVE = "MOVE"
    WEEK = "WEEK"
    INDA = "INDA"


class StatementFrequencyAndForm1(ISOModel):
    frqcy: Frequency7Code = Field(alias="Frqcy")
    com_mtd: CommunicationMethod2Choice = Field(alias="ComMtd")
    dlvry_adr: Max350Text = Field(alias="DlvryAdr")
    frmt: CommunicationFormat1Choice = Field(alias="Frmt")


class CustomerAccount5(ISOModel):
    id: list[AccountIdentification4Choice] = Field(alias="Id")
    nm: Max70Text | None = Field(None, alias="Nm")
    sts: AccountStatus3Code | None = Field(None, alias="Sts")
    tp: CashAccountType2Choice | None = Field(None, alias="Tp")
    ccy: ActiveCurrencyCode = Field(alias="Ccy")
    mnthly_pmt_val: Decimal | None = Field(None, alias="MnthlyPmtVal")
    mnthly_rcvd_val: Decimal | None = Field(None, alias="MnthlyRcvdVal")
    mnthly_tx_nb: Max5NumericText | None = Field(None, alias="MnthlyTxNb")
    avrg_bal: Decimal | None = Field(None, alias="AvrgBal")
    acct_purp: Max140Text | None = Field(None, alias="AcctPurp")
    flr_ntfctn_amt: Decimal | None = Field(None, alias="FlrNtfctnAmt")
    clng_ntfctn_amt: Decimal | None = Field(None, alias="ClngNtfctnAmt")
    stmt_frqcy_and_frmt: list[StatementFrequencyAndForm1] | None = Field(
        None, alias="StmtFrqcyAndFrmt"
    )
    clsg_dt: ISODate | None = Field(None, alias="ClsgDt")
    rstrctn: list[Restriction1] | None = Field(None, alias="Rstrctn")


class PartyAndCertificate6(ISOModel):
    pty: PartyIdentification272 = Field(alias="Pty")
    cert: Max10KBinary | None = Field(None, alias="Cert")


class Group6(ISOModel):
    grp_id: Max4AlphaNumericText = Field(alias="GrpId")
    pty: list[PartyAndCertificate6] = Field(alias="Pty")


class CommunicationMethod3Code(str, Enum):
    EMAL = "EMAL"
    FAXI = "FAXI"
    POST = "POST"
    PHON = "PHON"
    FILE = "FILE"
    ONLI = "ONLI"


class Channel2Choice(ChoiceModel):
    cd: CommunicationMethod3Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class Unlimited9Text(SimpleText):
    min_length = 9
    max_length = 9
    pattern = r"UNLIMITED"


class FixedAmountOrUnlimited1Choice(ChoiceModel):
    amt: ActiveCurrencyAndAmount | None = Field(None, alias="Amt")
    not_ltd: Unlimited9Text | None = Field(None, alias="NotLtd")


class MaximumAmountByPeriod1(ISOModel):
    max_amt: ActiveCurrencyAndAmount = Field(alias="MaxAmt")
    nb_of_days: Max3NumericText = Field(alias="NbOfDays")


class Authorisation2(ISOModel):
    max_amt_by_tx: FixedAmountOrUnlimited1Choice | None = Field(None, alias="MaxAmtByTx")
    max_amt_by_prd: list[MaximumAmountByPeriod1] | None = Field(None, alias="MaxAmtByPrd")
    max_amt_by_blk_submissn: FixedAmountOrUnlimited1Choice | None = Field(
        None, alias="MaxAmtByBlkSubmissn"
    )


class PartyOrGroup3Choice(ChoiceModel):
    grp_id: Max4AlphaNumericText | None = Field(None, alias="GrpId")
    pty: PartyAndCertificate6 | None = Field(None, alias="Pty")


class PartyAndAuthorisation7(ISOModel):
    pty_or_grp: PartyOrGroup3Choice = Field(alias="PtyOrGrp")
    sgntr_ordr: Max15PlusSignedNumericText | None = Field(None, alias="SgntrOrdr")
    authstn: Authorisation2 = Field(alias="Authstn")


class OperationMandate7(ISOModel):
    id: Max35Text = Field(alias="Id")
    aplbl_chanl: list[Channel2Choice] = Field(alias="AplblChanl")
    reqrd_sgntr_nb: Max15PlusSignedNumericText = Field(alias="ReqrdSgntrNb")
    sgntr_ordr_ind: bool = Field(alias="SgntrOrdrInd")
    mndt_hldr: list[PartyAndAuthorisation7] | None = Field(None, alias="MndtHldr")
    bk_opr: list[BankTransactionCodeStructure4] = Field(alias="BkOpr")
    start_dt: ISODate | None = Field(None, alias="StartDt")
    end_dt: ISODate | None = Field(None, alias="EndDt")


class AccountReport36(ISOModel):
    acct: CustomerAccount5 = Field(alias="Acct")
    undrlyg_mstr_agrmt: ContractDocument1 | None = Field(None, alias="UndrlygMstrAgrmt")
    ctrct_dts: AccountContract3 | None = Field(None, alias="CtrctDts")
    mndt: list[OperationMandate7] | None = Field(None, alias="Mndt")
    grp: list[Group6] | None = Field(None, alias="Grp")
    ref_acct: CashAccount40 | None = Field(None, alias="RefAcct")
    bal_trf_acct: AccountForAction1 | None = Field(None, alias="BalTrfAcct")
    trf_acct_svcr_id: BranchAndFinancialInstitutionIdentification8 | None = Field(
        None, alias="TrfAcctSvcrId"
    )


class PartyIdentification274(ISOModel):
    nm: Max140Text | None = Field(None, alias="Nm")
    pstl_adr: PostalAddress27 | None = Field(None, alias="PstlAdr")
    id: PersonIdentification18 | None = Field(None, alias="Id")
    ctry_of_res: CountryCode | None = Field(None, alias="CtryOfRes")
    ctct_dtls: Contact13 | None = Field(None, alias="CtctDtls")


class Organisation42(ISOModel):
    full_lgl_nm: Max350Text = Field(alias="FullLglNm")
    tradg_nm: Max350Text | None = Field(None, alias="TradgNm")
    ctry_of_opr: CountryCode = Field(alias="CtryOfOpr")
    regn_dt: ISODate | None = Field(None, alias="RegnDt")
    oprl_adr: PostalAddress27 | None = Field(None, alias="OprlAdr")
    biz_adr: PostalAddress27 | None = Field(None, alias="BizAdr")
    lgl_adr: PostalAddress27 = Field(alias="LglAdr")
    bllg_adr: PostalAddress27 | None = Field(None, alias="BllgAdr")
    org_id: OrganisationIdentification39 = Field(alias="OrgId")
    rprtv_offcr: list[PartyIdentification274] | None = Field(None, alias="RprtvOffcr")
    trsr_mgr: PartyIdentification274 | None = Field(None, alias="TrsrMgr")
    main_mndt_hldr: list[PartyIdentification274] | None = Field(None, alias="MainMndtHldr")
    sndr: list[PartyIdentification274] | None = Field(None, alias="Sndr")
    lgl_rprtv: list[PartyIdentification274] | None = Field(None, alias="LglRprtv")


class PartyAndSignature4(ISOModel):
    pty: PartyIdentification272 = Field(alias="Pty")
    sgntr: SkipPayload = Field(alias="Sgntr")


class UseCases1Code(str, Enum):
    OPEN = "OPEN"
    MNTN = "MNTN"
    CLSG = "CLSG"
    VIEW = "VIEW"


class References5(ISOModel):
    req_tp: UseCases1Code = Field(alias="ReqTp")
    msg_id: MessageIdentification1 = Field(alias="MsgId")
    prc_id: MessageIdentification1 = Field(alias="PrcId")
    ackd_msg_id: list[MessageIdentification1] | None = Field(None, alias="AckdMsgId")
    sts: Max35Text | None = Field(None, alias="Sts")
    attchd_doc_nm: list[Max70Text] | None = Field(None, alias="AttchdDocNm")


@message("acmt.014.001.05", "AcctRpt")
class AccountReportV05(ISOModel):
    """Message root of acmt.014.001.05, carried in the <AcctRpt> element."""

    refs: References5 = Field(alias="Refs")
    fr: OrganisationIdentification39 | None = Field(None, alias="Fr")
    acct_svcr_id: BranchAndFinancialInstitutionIdentification8 = Field(alias="AcctSvcrId")
    org: Organisation42 = Field(alias="Org")
    rpt: list[AccountReport36] | None = Field(None, alias="Rpt")
    dgtl_sgntr: list[PartyAndSignature4] | None = Field(None, alias="DgtlSgntr")
    splmtry_data: list[SupplementaryData1] | None = Field(None, alias="SplmtryData")
