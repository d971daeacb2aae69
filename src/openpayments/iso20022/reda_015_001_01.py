"""
reda.015.001.01 - PartyQueryV01

Party query, sent by a party to a settlement system to query reference data about parties.

Only the types specific to this message are declared here; shared types come from
openpayments.iso20022.common.
"""

from enum import Enum

from pydantic import Field

from openpayments.domain.models import ChoiceModel, ISOModel
from openpayments.domain.registry import message
from openpayments.iso20022.common import (
    DatePeriod2,
    DateTimePeriod1,
    GenericIdentification1,
    ISODate,
    ISODateTime,
    Max35Text,
    PartyIdentification136,
    PartyLockStatus1,
    ResidenceType1Code,
    SupplementaryData1,
    SystemPartyType1Choice,
)


class DatePeriodSearch1Choice(ChoiceModel):
    fr_dt: ISODate | None = Field(None, alias="FrDt")
    to_dt: ISODate | None = Field(None, alias="ToDt")
    fr_to_dt: DatePeriod2 | None = Field(None, alias="FrToDt")
    eq_dt: ISODate | None = Field(None, alias="EQDt")
    neq_dt: ISODate | None = Field(None, alias="NEQDt")


class DateTimeSearch2Choice(ChoiceModel):
    fr_dt_tm: ISODateTime | None = Field(None, alias="FrDtTm")
    to_dt_tm: ISODateTime | None = Field(None, alias="ToDtTm")
    fr_to_dt_tm: DateTimePeriod1 | None = Field(None, alias="FrToDtTm")
    eq_dt_tm: ISODateTime | None = Field(None, alias="EQDtTm")
    neq_dt_tm: ISODateTime | None = Field(None, alias="NEQDtTm")


class DateAndDateTimeSearch4Choice(ChoiceModel):
    dt_tm: DateTimeSearch2Choice | None = Field(None, alias="DtTm")
    dt: DatePeriodSearch1Choice | None = Field(None, alias="Dt")


class RequestType1Code(str, Enum):
    RT01 = "RT01"
    RT02 = "RT02"
    RT03 = "RT03"
    RT04 = "RT04"
    RT05 = "RT05"


class RequestType2Code(str, Enum):
    RT11 = "RT11"
    RT12 = "RT12"
    RT13 = "RT13"
    RT14 = "RT14"
    RT15 = "RT15"


class RequestType2Choice(ChoiceModel):
    pmt_ctrl: RequestType1Code | None = Field(None, alias="PmtCtrl")
    enqry: RequestType2Code | None = Field(None, alias="Enqry")
    prtry: GenericIdentification1 | None = Field(None, alias="Prtry")


class MessageHeader2(ISOModel):
    msg_id: Max35Text = Field(alias="MsgId")
    cre_dt_tm: ISODateTime | None = Field(None, alias="CreDtTm")
    req_tp: RequestType2Choice | None = Field(None, alias="ReqTp")


class PartyDataReturnCriteria2(ISOModel):
    opng_dt: bool | None = Field(None, alias="OpngDt")
    clsg_dt: bool | None = Field(None, alias="ClsgDt")
    tp: bool | None = Field(None, alias="Tp")
    pty_id: bool | None = Field(None, alias="PtyId")
    rspnsbl_pty_id: bool | None = Field(None, alias="RspnsblPtyId")
    rstrctn_id: bool | None = Field(None, alias="RstrctnId")
    rstrctd_on_dt: bool | None = Field(None, alias="RstrctdOnDt")
    nm: bool | None = Field(None, alias="Nm")
    shrt_nm: bool | None = Field(None, alias="ShrtNm")
    adr: bool | None = Field(None, alias="Adr")
    tech_adr: bool | None = Field(None, alias="TechAdr")
    ctct_dtls: bool | None = Field(None, alias="CtctDtls")
    res_tp: bool | None = Field(None, alias="ResTp")
    lck_sts: bool | None = Field(None, alias="LckSts")
    mkt_spcfc_attr: bool | None = Field(None, alias="MktSpcfcAttr")


class PartyDataSearchCriteria2(ISOModel):
    opng_dt: DatePeriodSearch1Choice | None = Field(None, alias="OpngDt")
    clsg_dt: DatePeriodSearch1Choice | None = Field(None, alias="ClsgDt")
    tp: SystemPartyType1Choice | None = Field(None, alias="Tp")
    rspnsbl_pty_id: PartyIdentification136 | None = Field(None, alias="RspnsblPtyId")
    pty_id: PartyIdentification136 | None = Field(None, alias="PtyId")
    rstrctn_id: Max35Text | None = Field(None, alias="RstrctnId")
    rstrctn_isse_dt: DateAndDateTimeSearch4Choice | None = Field(None, alias="RstrctnIsseDt")
    res_tp: ResidenceType1Code | None = Field(None, alias="ResTp")
    lck_sts: PartyLockStatus1 | None = Field(None, alias="LckSts")


@message("reda.015.001.01", "PtyQry")
class PartyQueryV01(ISOModel):
    """Message root of reda.015.001.01, carried in the <PtyQry> element."""

    msg_hdr: MessageHeader2 | None = Field(None, alias="MsgHdr")
    sch_crit: PartyDataSearchCriteria2 = Field(alias="SchCrit")
    rtr_crit: PartyDataReturnCriteria2 | None = Field(None, alias="RtrCrit")
    splmtry_data: list[SupplementaryData1] | None = Field(None, alias="SplmtryData")
