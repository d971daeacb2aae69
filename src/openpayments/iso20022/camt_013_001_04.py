"""
camt.013.001.04 - GetMemberV04

Get member, sent by a member to the transaction administrator to request static data about
members of a system.

Only the types specific to this message are declared here; shared types come from
openpayments.iso20022.common.
"""

from enum import Enum

from pydantic import Field

from openpayments.domain.models import ChoiceModel, ISOModel
from openpayments.domain.registry import message
from openpayments.domain.types import SimpleText
from openpayments.iso20022.common import (
    BICFIDec2014Identifier,
    ClearingSystemMemberIdentification2,
    GenericFinancialIdentification1,
    ISODateTime,
    Max35Text,
    RequestType4Choice,
    SupplementaryData1,
)


class ExternalSystemMemberType1Code(SimpleText):
    min_length = 1
    max_length = 4


class MemberReturnCriteria1(ISOModel):
    nm_ind: bool | None = Field(None, alias="NmInd")
    mmb_rtr_adr_ind: bool | None = Field(None, alias="MmbRtrAdrInd")
    acct_ind: bool | None = Field(None, alias="AcctInd")
    tp_ind: bool | None = Field(None, alias="TpInd")
    sts_ind: bool | None = Field(None, alias="StsInd")
    ctct_ref_ind: bool | None = Field(None, alias="CtctRefInd")
    com_adr_ind: bool | None = Field(None, alias="ComAdrInd")


class MemberIdentification3Choice(ChoiceModel):
    bicfi: BICFIDec2014Identifier | None = Field(None, alias="BICFI")
    clr_sys_mmb_id: ClearingSystemMemberIdentification2 | None = Field(None, alias="ClrSysMmbId")
    othr: GenericFinancialIdentification1 | None = Field(None, alias="Othr")


class MemberStatus1Code(str, Enum):
    ENBL = "ENBL"
    DSBL = "DSBL"
    DLTD = "DLTD"
    JOIN = "JOIN"


class SystemMemberStatus1Choice(ChoiceModel):
    cd: MemberStatus1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class SystemMemberType1Choice(ChoiceModel):
    cd: ExternalSystemMemberType1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class MemberSearchCriteria4(ISOModel):
    id: list[MemberIdentification3Choice] | None = Field(None, alias="Id")
    tp: list[SystemMemberType1Choice] | None = Field(None, alias="Tp")
    sts: list[SystemMemberStatus1Choice] | None = Field(None, alias="Sts")


class MemberCriteria4(ISOModel):
    new_qry_nm: Max35Text | None = Field(None, alias="NewQryNm")
    sch_crit: list[MemberSearchCriteria4] | None = Field(None, alias="SchCrit")
    rtr_crit: MemberReturnCriteria1 | None = Field(None, alias="RtrCrit")


class MemberCriteriaDefinition2Choice(ChoiceModel):
    qry_nm: Max35Text | None = Field(None, alias="QryNm")
    new_crit: MemberCriteria4 | None = Field(None, alias="NewCrit")


class QueryType2Code(str, Enum):
    ALLL = "ALLL"
    CHNG = "CHNG"
    MODF = "MODF"
    DELD = "DELD"


class MemberQueryDefinition4(ISOModel):
    qry_tp: QueryType2Code | None = Field(None, alias="QryTp")
    mmb_crit: MemberCriteriaDefinition2Choice | None = Field(None, alias="MmbCrit")


class MessageHeader9(ISOModel):
    msg_id: Max35Text = Field(alias="MsgId")
    cre_dt_tm: ISODateTime | None = Field(None, alias="CreDtTm")
    req_tp: RequestType4Choice | None = Field(None, alias="ReqTp")


@message("camt.013.001.04", "GetMmb")
class GetMemberV04(ISOModel):
    """Message root of camt.013.001.04, carried in the <GetMmb> element."""

    msg_hdr: MessageHeader9 = Field(alias="MsgHdr")
    mmb_qry_def: MemberQueryDefinition4 | None = Field(None, alias="MmbQryDef")
    splmtry_data: list[SupplementaryData1] | None = Field(None, alias="SplmtryData")
