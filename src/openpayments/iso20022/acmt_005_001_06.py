"""
acmt.005.001.06 - RequestForAccountManagementStatusReportV06

Request for account management status report, sent to an account servicer to ask for the status of
a previously sent account opening, modification or closing instruction.

Only the types specific to this message are declared here; shared types come from
openpayments.iso20022.common.
"""

from enum import Enum

from pydantic import Field

from openpayments.domain.models import ChoiceModel, ISOModel
from openpayments.domain.registry import message
from openpayments.iso20022.common import (
    AnyBICDec2014Identifier,
    Exact4AlphaNumericText,
    GenericIdentification1,
    ISODate,
    LEIIdentifier,
    Max350Text,
    Max35Text,
    Max4AlphaNumericText,
    MessageIdentification1,
    NameAndAddress5,
)


class Account23(ISOModel):
    acct_id: Max35Text = Field(alias="AcctId")
    rltd_acct_dtls: GenericIdentification1 | None = Field(None, alias="RltdAcctDtls")


class AccountManagementType3Code(str, Enum):
    ACCM = "ACCM"
    ACCO = "ACCO"
    GACC = "GACC"
    ACST = "ACST"


class GenericIdentification47(ISOModel):
    id: Exact4AlphaNumericText = Field(alias="Id")
    issr: Max4AlphaNumericText = Field(alias="Issr")
    schme_nm: Max4AlphaNumericText | None = Field(None, alias="SchmeNm")


class PartyIdentificationType7Code(str, Enum):
    ATIN = "ATIN"
    IDCD = "IDCD"
    NRIN = "NRIN"
    OTHR = "OTHR"
    PASS = "PASS"
    POCD = "POCD"
    SOCS = "SOCS"
    SRSA = "SRSA"
    GUNL = "GUNL"
    GTIN = "GTIN"
    ITIN = "ITIN"
    CPFA = "CPFA"
    AREG = "AREG"
    DRLC = "DRLC"
    EMID = "EMID"
    NINV = "NINV"
    INCL = "INCL"
    GIIN = "GIIN"


class OtherIdentification3Choice(ChoiceModel):
    cd: PartyIdentificationType7Code | None = Field(None, alias="Cd")
    prtry: GenericIdentification47 | None = Field(None, alias="Prtry")


class GenericIdentification81(ISOModel):
    id: Max35Text = Field(alias="Id")
    id_tp: OtherIdentification3Choice = Field(alias="IdTp")


class GenderCode(str, Enum):
    MALE = "MALE"
    FEMA = "FEMA"


class IndividualPerson30(ISOModel):
    gvn_nm: Max35Text | None = Field(None, alias="GvnNm")
    mddl_nm: Max35Text | None = Field(None, alias="MddlNm")
    nm: Max350Text = Field(alias="Nm")
    gndr: GenderCode | None = Field(None, alias="Gndr")
    birth_dt: ISODate | None = Field(None, alias="BirthDt")


class IndividualPersonIdentification2Choice(ChoiceModel):
    id_nb: GenericIdentification81 | None = Field(None, alias="IdNb")
    prsn_nm: IndividualPerson30 | None = Field(None, alias="PrsnNm")


class PartyIdentification125Choice(ChoiceModel):
    any_bic: AnyBICDec2014Identifier | None = Field(None, alias="AnyBIC")
    prtry_id: GenericIdentification1 | None = Field(None, alias="PrtryId")
    nm_and_adr: NameAndAddress5 | None = Field(None, alias="NmAndAdr")


class PartyIdentification139(ISOModel):
    pty: PartyIdentification125Choice = Field(alias="Pty")
    lei: LEIIdentifier | None = Field(None, alias="LEI")


class OwnerIdentification3Choice(ChoiceModel):
    indv_ownr_id: IndividualPersonIdentification2Choice | None = Field(None, alias="IndvOwnrId")
    org_ownr_id: PartyIdentification139 | None = Field(None, alias="OrgOwnrId")


class InvestmentAccount77(ISOModel):
    acct_id: Max35Text = Field(alias="AcctId")
    acct_nm: Max35Text | None = Field(None, alias="AcctNm")
    acct_dsgnt: Max35Text | None = Field(None, alias="AcctDsgnt")
    ownr_id: OwnerIdentification3Choice | None = Field(None, alias="OwnrId")
    acct_svcr: PartyIdentification125Choice | None = Field(None, alias="AcctSvcr")


class AdditionalReference13(ISOModel):
    ref: Max35Text = Field(alias="Ref")
    ref_issr: PartyIdentification125Choice | None = Field(None, alias="RefIssr")
    msg_nm: Max35Text | None = Field(None, alias="MsgNm")


class LinkedMessage5Choice(ChoiceModel):
    prvs_ref: AdditionalReference13 | None = Field(None, alias="PrvsRef")
    othr_ref: AdditionalReference13 | None = Field(None, alias="OthrRef")


class AccountManagementMessageReference5(ISOModel):
    lkd_ref: LinkedMessage5Choice | None = Field(None, alias="LkdRef")
    sts_req_tp: AccountManagementType3Code = Field(alias="StsReqTp")
    acct_appl_id: Max35Text | None = Field(None, alias="AcctApplId")
    exstg_acct_id: Account23 | None = Field(None, alias="ExstgAcctId")
    invstmt_acct: InvestmentAccount77 | None = Field(None, alias="InvstmtAcct")


@message("acmt.005.001.06", "ReqForAcctMgmtStsRpt")
class RequestForAccountManagementStatusReportV06(ISOModel):
    """Message root of acmt.005.001.06, carried in the <ReqForAcctMgmtStsRpt> element."""

    msg_id: MessageIdentification1 = Field(alias="MsgId")
    req_dtls: AccountManagementMessageReference5 = Field(alias="ReqDtls")
