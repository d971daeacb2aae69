"""
reda.043.001.02 - PartyAuditTrailReportV02

Party audit trail report, sent by a settlement system with the audit trail of changes to party
reference data.

Only the types specific to this message are declared here; shared types come from
openpayments.iso20022.common.
"""

from pydantic import Field

from openpayments.domain.models import ChoiceModel, ISOModel
from openpayments.domain.registry import message
from openpayments.iso20022.common import (
    AddressType3Choice,
    BICFIDec2014Identifier,
    CountryCode,
    DatePeriod2,
    ErrorHandling5,
    ISODate,
    ISODateTime,
    Max140Text,
    Max16Text,
    Max2048Text,
    Max256Text,
    Max350Text,
    Max35Text,
    Max70Text,
    NamePrefix2Code,
    OtherContact1,
    PartyLockStatus1,
    PhoneNumber,
    PreferredContactMethod2Code,
    ResidenceType1Code,
    Restriction1,
    SupplementaryData1,
    SystemPartyIdentification8,
    SystemPartyType1Choice,
)


class Contact14(ISOModel):
    nm_prfx: NamePrefix2Code | None = Field(None, alias="NmPrfx")
    nm: Max140Text | None = Field(None, alias="Nm")
    phne_nb: PhoneNumber | None = Field(None, alias="PhneNb")
    mob_nb: PhoneNumber | None = Field(None, alias="MobNb")
    fax_nb: PhoneNumber | None = Field(None, alias="FaxNb")
    url_adr: Max2048Text | None = Field(None, alias="URLAdr")
    email_adr: Max256Text | None = Field(None, alias="EmailAdr")
    email_purp: Max35Text | None = Field(None, alias="EmailPurp")
    job_titl: Max35Text | None = Field(None, alias="JobTitl")
    rspnsblty: Max35Text | None = Field(None, alias="Rspnsblty")
    dept: Max70Text | None = Field(None, alias="Dept")
    othr: list[OtherContact1] | None = Field(None, alias="Othr")
    prefrd_mtd: PreferredContactMethod2Code | None = Field(None, alias="PrefrdMtd")
    vld_fr: str | None = Field(None, alias="VldFr")
    vld_to: str | None = Field(None, alias="VldTo")


class DatePeriod3Choice(ChoiceModel):
    fr_dt: ISODate | None = Field(None, alias="FrDt")
    to_dt: ISODate | None = Field(None, alias="ToDt")
    fr_to_dt: DatePeriod2 | None = Field(None, alias="FrToDt")
    dt: ISODate | None = Field(None, alias="Dt")


class MarketSpecificAttribute1(ISOModel):
    nm: Max35Text = Field(alias="Nm")
    val: Max350Text = Field(alias="Val")


class OriginalBusinessInstruction1(ISOModel):
    msg_id: Max35Text = Field(alias="MsgId")
    msg_nm_id: Max35Text | None = Field(None, alias="MsgNmId")
    cre_dt_tm: ISODateTime | None = Field(None, alias="CreDtTm")


class MessageHeader12(ISOModel):
    msg_id: Max35Text = Field(alias="MsgId")
    cre_dt_tm: ISODateTime | None = Field(None, alias="CreDtTm")
    orgnl_biz_instr: OriginalBusinessInstruction1 | None = Field(None, alias="OrgnlBizInstr")


class PostalAddress28(ISOModel):
    adr_tp: AddressType3Choice | None = Field(None, alias="AdrTp")
    care_of: Max140Text | None = Field(None, alias="CareOf")
    dept: Max70Text | None = Field(None, alias="Dept")
    sub_dept: Max70Text | None = Field(None, alias="SubDept")
    strt_nm: Max140Text | None = Field(None, alias="StrtNm")
    bldg_nb: Max16Text | None = Field(None, alias="BldgNb")
    bldg_nm: Max140Text | None = Field(None, alias="BldgNm")
    flr: Max70Text | None = Field(None, alias="Flr")
    unit_nb: Max16Text | None = Field(None, alias="UnitNb")
    pst_bx: Max16Text | None = Field(None, alias="PstBx")
    room: Max70Text | None = Field(None, alias="Room")
    pst_cd: Max16Text | None = Field(None, alias="PstCd")
    twn_nm: Max140Text | None = Field(None, alias="TwnNm")
    twn_lctn_nm: Max140Text | None = Field(None, alias="TwnLctnNm")
    dstrct_nm: Max140Text | None = Field(None, alias="DstrctNm")
    ctry_sub_dvsn: Max35Text | None = Field(None, alias="CtrySubDvsn")
    ctry: CountryCode | None = Field(None, alias="Ctry")
    adr_line: list[Max70Text] | None = Field(None, alias="AdrLine")
    vld_fr: str | None = Field(None, alias="VldFr")


class UpdateLogAddress2(ISOModel):
    od: PostalAddress28 = Field(alias="Od")
    new: PostalAddress28 = Field(alias="New")


class UpdateLogContact2(ISOModel):
    od: Contact14 = Field(alias="Od")
    new: Contact14 = Field(alias="New")


class UpdateLogDate1(ISOModel):
    od: str = Field(alias="Od")
    new: str = Field(alias="New")


class UpdateLogMarketSpecificAttribute1(ISOModel):
    od: MarketSpecificAttribute1 = Field(alias="Od")
    new: MarketSpecificAttribute1 = Field(alias="New")


class UpdateLogPartyLockStatus1(ISOModel):
    od: PartyLockStatus1 = Field(alias="Od")
    new: PartyLockStatus1 = Field(alias="New")


class PartyName4(ISOModel):
    vld_fr: str | None = Field(None, alias="VldFr")
    nm: Max350Text = Field(alias="Nm")
    shrt_nm: Max35Text | None = Field(None, alias="ShrtNm")


class UpdateLogPartyName1(ISOModel):
    od: PartyName4 = Field(alias="Od")
    new: PartyName4 = Field(alias="New")


class UpdateLogProprietary1(ISOModel):
    fld_nm: Max35Text = Field(alias="FldNm")
    od_fld_val: Max350Text = Field(alias="OdFldVal")
    new_fld_val: Max350Text = Field(alias="NewFldVal")


class UpdateLogResidenceType1(ISOModel):
    od: ResidenceType1Code = Field(alias="Od")
    new: ResidenceType1Code = Field(alias="New")


class UpdateLogRestriction1(ISOModel):
    od: Restriction1 = Field(alias="Od")
    new: Restriction1 = Field(alias="New")


class UpdateLogSystemPartyType1(ISOModel):
    od: SystemPartyType1Choice = Field(alias="Od")
    new: SystemPartyType1Choice = Field(alias="New")


class TechnicalIdentification2Choice(ChoiceModel):
    bicfi: BICFIDec2014Identifier | None = Field(None, alias="BICFI")
    tech_adr: Max256Text | None = Field(None, alias="TechAdr")


class UpdateLogTechnicalAddress1(ISOModel):
    od: TechnicalIdentification2Choice = Field(alias="Od")
    new: TechnicalIdentification2Choice = Field(alias="New")


class UpdateLogPartyRecord2Choice(ChoiceModel):
    adr: UpdateLogAddress2 | None = Field(None, alias="Adr")
    ctct_dtls: UpdateLogContact2 | None = Field(None, alias="CtctDtls")
    opng_dt: UpdateLogDate1 | None = Field(None, alias="OpngDt")
    clsg_dt: UpdateLogDate1 | None = Field(None, alias="ClsgDt")
    tp: UpdateLogSystemPartyType1 | None = Field(None, alias="Tp")
    tech_adr: UpdateLogTechnicalAddress1 | None = Field(None, alias="TechAdr")
    mkt_spcfc_attr: UpdateLogMarketSpecificAttribute1 | None = Field(None, alias="MktSpcfcAttr")
    nm: UpdateLogPartyName1 | None = Field(None, alias="Nm")
    res_tp: UpdateLogResidenceType1 | None = Field(None, alias="ResTp")
    lck_sts: UpdateLogPartyLockStatus1 | None = Field(None, alias="LckSts")
    rstrctn: UpdateLogRestriction1 | None = Field(None, alias="Rstrctn")
    othr: list[UpdateLogProprietary1] | None = Field(None, alias="Othr")


class PartyAuditTrail2(ISOModel):
    rcrd: list[UpdateLogPartyRecord2Choice] = Field(alias="Rcrd")
    opr_tm_stmp: ISODateTime = Field(alias="OprTmStmp")
    instg_usr: Max256Text = Field(alias="InstgUsr")
    apprvg_usr: Max256Text | None = Field(None, alias="ApprvgUsr")


class PartyAuditTrailOrError4Choice(ChoiceModel):
    audt_trl: list[PartyAuditTrail2] | None = Field(None, alias="AudtTrl")
    biz_err: list[ErrorHandling5] | None = Field(None, alias="BizErr")


class PartyAuditTrailReport4(ISOModel):
    pty_audt_trl_or_err: PartyAuditTrailOrError4Choice = Field(alias="PtyAudtTrlOrErr")
    dt_prd: DatePeriod3Choice | None = Field(None, alias="DtPrd")
    pty_id: SystemPartyIdentification8 = Field(alias="PtyId")


class PartyAuditTrailOrError3Choice(ChoiceModel):
    pty_audt_trl_rpt: list[PartyAuditTrailReport4] | None = Field(None, alias="PtyAudtTrlRpt")
    oprl_err: list[ErrorHandling5] | None = Field(None, alias="OprlErr")


@message("reda.043.001.02", "PtyAuditTrlRpt")
class PartyAuditTrailReportV02(ISOModel):
    """Message root of reda.043.001.02, carried in the <PtyAuditTrlRpt> element."""

    msg_hdr: MessageHeader12 | None = Field(None, alias="MsgHdr")
    rpt_or_err: PartyAuditTrailOrError3Choice = Field(alias="RptOrErr")
    splmtry_data: list[SupplementaryData1] | None = Field(None, alias="SplmtryData")
