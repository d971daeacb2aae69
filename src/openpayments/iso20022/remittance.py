"""
Remittance (remt) business area components.

Types used by the remittance advice messages. Their length and pattern rules are declared on the
fields themselves rather than through named simple types.
"""

from decimal import Decimal
from enum import Enum
from typing import Annotated

from pydantic import Field

from openpayments.domain.models import ChoiceModel, ISOModel, attribute, content
from openpayments.domain.types import Facets
from openpayments.iso20022.common import (
    AddressType2Code,
    CopyDuplicate1Code,
    CreditDebitCode,
    DateAndDateTime2Choice,
    ExchangeRateType1Code,
    ISODate,
    ISODateTime,
    NamePrefix2Code,
    PreferredContactMethod2Code,
    Priority2Code,
    RemittanceLocationMethod2Code,
    SupplementaryDataEnvelope1,
    TaxPeriod3,
)


class AccountSchemeName1Choice(ChoiceModel):
    cd: Annotated[str | None, Facets(min_length=1, max_length=4)] = Field(None, alias="Cd")
    prtry: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(None, alias="Prtry")


class GenericAccountIdentification1(ISOModel):
    id: Annotated[str, Facets(min_length=1, max_length=34)] = Field(alias="Id")
    schme_nm: AccountSchemeName1Choice | None = Field(None, alias="SchmeNm")
    issr: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(None, alias="Issr")


class AccountIdentification4Choice(ChoiceModel):
    iban: Annotated[str | None, Facets(pattern=r"[A-Z]{2,2}[0-9]{2,2}[a-zA-Z0-9]{1,30}")] = Field(
        None, alias="IBAN"
    )
    othr: GenericAccountIdentification1 | None = Field(None, alias="Othr")


class ActiveOrHistoricCurrencyAndAmount(ISOModel):
    ccy: str = attribute("Ccy")
    value: Decimal = content()


class GenericIdentification30(ISOModel):
    id: Annotated[str, Facets(pattern=r"[a-zA-Z0-9]{4}")] = Field(alias="Id")
    issr: Annotated[str, Facets(min_length=1, max_length=35)] = Field(alias="Issr")
    schme_nm: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(
        None, alias="SchmeNm"
    )


class AddressType3Choice(ChoiceModel):
    cd: AddressType2Code | None = Field(None, alias="Cd")
    prtry: GenericIdentification30 | None = Field(None, alias="Prtry")


class EquivalentAmount2(ISOModel):
    amt: ActiveOrHistoricCurrencyAndAmount = Field(alias="Amt")
    ccy_of_trf: Annotated[str, Facets(pattern=r"[A-Z]{3,3}")] = Field(alias="CcyOfTrf")


class AmountType3Choice(ChoiceModel):
    instd_amt: ActiveOrHistoricCurrencyAndAmount | None = Field(None, alias="InstdAmt")
    eqvt_amt: EquivalentAmount2 | None = Field(None, alias="EqvtAmt")


class Authorisation1Code(str, Enum):
    AUTH = "AUTH"
    FDET = "FDET"
    FSUM = "FSUM"
    ILEV = "ILEV"


class Authorisation1Choice(ChoiceModel):
    cd: Authorisation1Code | None = Field(None, alias="Cd")
    prtry: Annotated[str | None, Facets(min_length=1, max_length=128)] = Field(None, alias="Prtry")


class PostalAddress27(ISOModel):
    adr_tp: AddressType3Choice | None = Field(None, alias="AdrTp")
    care_of: Annotated[str | None, Facets(min_length=1, max_length=140)] = Field(
        None, alias="CareOf"
    )
    dept: Annotated[str | None, Facets(min_length=1, max_length=70)] = Field(None, alias="Dept")
    sub_dept: Annotated[str | None, Facets(min_length=1, max_length=70)] = Field(
        None, alias="SubDept"
    )
    strt_nm: Annotated[str | None, Facets(min_length=1, max_length=140)] = Field(
        None, alias="StrtNm"
    )
    bldg_nb: Annotated[str | None, Facets(min_length=1, max_length=16)] = Field(
        None, alias="BldgNb"
    )
    bldg_nm: Annotated[str | None, Facets(min_length=1, max_length=140)] = Field(
        None, alias="BldgNm"
    )
    flr: Annotated[str | None, Facets(min_length=1, max_length=70)] = Field(None, alias="Flr")
    unit_nb: Annotated[str | None, Facets(min_length=1, max_length=16)] = Field(
        None, alias="UnitNb"
    )
    pst_bx: Annotated[str | None, Facets(min_length=1, max_length=16)] = Field(None, alias="PstBx")
    room: Annotated[str | None, Facets(min_length=1, max_length=70)] = Field(None, alias="Room")
    pst_cd: Annotated[str | None, Facets(min_length=1, max_length=16)] = Field(None, alias="PstCd")
    twn_nm: Annotated[str | None, Facets(min_length=1, max_length=140)] = Field(
        None, alias="TwnNm"
    )
    twn_lctn_nm: Annotated[str | None, Facets(min_length=1, max_length=140)] = Field(
        None, alias="TwnLctnNm"
    )
    dstrct_nm: Annotated[str | None, Facets(min_length=1, max_length=140)] = Field(
        None, alias="DstrctNm"
    )
    ctry_sub_dvsn: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(
        None, alias="CtrySubDvsn"
    )
    ctry: Annotated[str | None, Facets(pattern=r"[A-Z]{2,2}")] = Field(None, alias="Ctry")
    adr_line: Annotated[list[str] | None, Facets(min_length=1, max_length=70)] = Field(
        None, alias="AdrLine"
    )


class BranchData5(ISOModel):
    id: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(None, alias="Id")
    lei: Annotated[str | None, Facets(pattern=r"[A-Z0-9]{18,18}[0-9]{2,2}")] = Field(
        None, alias="LEI"
    )
    nm: Annotated[str | None, Facets(min_length=1, max_length=140)] = Field(None, alias="Nm")
    pstl_adr: PostalAddress27 | None = Field(None, alias="PstlAdr")


class ClearingSystemIdentification2Choice(ChoiceModel):
    cd: Annotated[str | None, Facets(min_length=1, max_length=5)] = Field(None, alias="Cd")
    prtry: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(None, alias="Prtry")


class ClearingSystemMemberIdentification2(ISOModel):
    clr_sys_id: ClearingSystemIdentification2Choice | None = Field(None, alias="ClrSysId")
    mmb_id: Annotated[str, Facets(min_length=1, max_length=35)] = Field(alias="MmbId")


class FinancialIdentificationSchemeName1Choice(ChoiceModel):
    cd: Annotated[str | None, Facets(min_length=1, max_length=4)] = Field(None, alias="Cd")
    prtry: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(None, alias="Prtry")


class GenericFinancialIdentification1(ISOModel):
    id: Annotated[str, Facets(min_length=1, max_length=35)] = Field(alias="Id")
    schme_nm: FinancialIdentificationSchemeName1Choice | None = Field(None, alias="SchmeNm")
    issr: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(None, alias="Issr")


class FinancialInstitutionIdentification23(ISOModel):
    bicfi: Annotated[
        str | None, Facets(pattern=r"[A-Z0-9]{4,4}[A-Z]{2,2}[A-Z0-9]{2,2}([A-Z0-9]{3,3}){0,1}")
    ] = Field(None, alias="BICFI")
    clr_sys_mmb_id: ClearingSystemMemberIdentification2 | None = Field(None, alias="ClrSysMmbId")
    lei: Annotated[str | None, Facets(pattern=r"[A-Z0-9]{18,18}[0-9]{2,2}")] = Field(
        None, alias="LEI"
    )
    nm: Annotated[str | None, Facets(min_length=1, max_length=140)] = Field(None, alias="Nm")
    pstl_adr: PostalAddress27 | None = Field(None, alias="PstlAdr")
    othr: GenericFinancialIdentification1 | None = Field(None, alias="Othr")


class BranchAndFinancialInstitutionIdentification8(ISOModel):
    fin_instn_id: FinancialInstitutionIdentification23 = Field(alias="FinInstnId")
    brnch_id: BranchData5 | None = Field(None, alias="BrnchId")


class CashAccountType2Choice(ChoiceModel):
    cd: Annotated[str | None, Facets(min_length=1, max_length=4)] = Field(None, alias="Cd")
    prtry: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(None, alias="Prtry")


class ProxyAccountType1Choice(ChoiceModel):
    cd: Annotated[str | None, Facets(min_length=1, max_length=4)] = Field(None, alias="Cd")
    prtry: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(None, alias="Prtry")


class ProxyAccountIdentification1(ISOModel):
    tp: ProxyAccountType1Choice | None = Field(None, alias="Tp")
    id: Annotated[str, Facets(min_length=1, max_length=2048)] = Field(alias="Id")


class CashAccount40(ISOModel):
    id: AccountIdentification4Choice | None = Field(None, alias="Id")
    tp: CashAccountType2Choice | None = Field(None, alias="Tp")
    ccy: Annotated[str | None, Facets(pattern=r"[A-Z]{3,3}")] = Field(None, alias="Ccy")
    nm: Annotated[str | None, Facets(min_length=1, max_length=70)] = Field(None, alias="Nm")
    prxy: ProxyAccountIdentification1 | None = Field(None, alias="Prxy")


class CategoryPurpose1Choice(ChoiceModel):
    cd: Annotated[str | None, Facets(min_length=1, max_length=4)] = Field(None, alias="Cd")
    prtry: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(None, alias="Prtry")


class OtherContact1(ISOModel):
    chanl_tp: Annotated[str, Facets(min_length=1, max_length=4)] = Field(alias="ChanlTp")
    id: Annotated[str | None, Facets(min_length=1, max_length=128)] = Field(None, alias="Id")


class Contact13(ISOModel):
    nm_prfx: NamePrefix2Code | None = Field(None, alias="NmPrfx")
    nm: Annotated[str | None, Facets(min_length=1, max_length=140)] = Field(None, alias="Nm")
    phne_nb: Annotated[str | None, Facets(pattern=r"\+[0-9]{1,3}-[0-9()+\-]{1,30}")] = Field(
        None, alias="PhneNb"
    )
    mob_nb: Annotated[str | None, Facets(pattern=r"\+[0-9]{1,3}-[0-9()+\-]{1,30}")] = Field(
        None, alias="MobNb"
    )
    fax_nb: Annotated[str | None, Facets(pattern=r"\+[0-9]{1,3}-[0-9()+\-]{1,30}")] = Field(
        None, alias="FaxNb"
    )
    url_adr: Annotated[str | None, Facets(min_length=1, max_length=2048)] = Field(
        None, alias="URLAdr"
    )
    email_adr: Annotated[str | None, Facets(min_length=1, max_length=256)] = Field(
        None, alias="EmailAdr"
    )
    email_purp: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(
        None, alias="EmailPurp"
    )
    job_titl: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(
        None, alias="JobTitl"
    )
    rspnsblty: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(
        None, alias="Rspnsblty"
    )
    dept: Annotated[str | None, Facets(min_length=1, max_length=70)] = Field(None, alias="Dept")
    othr: list[OtherContact1] | None = Field(None, alias="Othr")
    prefrd_mtd: PreferredContactMethod2Code | None = Field(None, alias="PrefrdMtd")


class CreditorReferenceType2Choice(ChoiceModel):
    cd: Annotated[str | None, Facets(min_length=1, max_length=4)] = Field(None, alias="Cd")
    prtry: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(None, alias="Prtry")


class CreditorReferenceType3(ISOModel):
    cd_or_prtry: CreditorReferenceType2Choice = Field(alias="CdOrPrtry")
    issr: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(None, alias="Issr")


class CreditorReferenceInformation3(ISOModel):
    tp: CreditorReferenceType3 | None = Field(None, alias="Tp")
    ref: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(None, alias="Ref")


class DateAndPlaceOfBirth1(ISOModel):
    birth_dt: ISODate = Field(alias="BirthDt")
    prvc_of_birth: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(
        None, alias="PrvcOfBirth"
    )
    city_of_birth: Annotated[str, Facets(min_length=1, max_length=35)] = Field(alias="CityOfBirth")
    ctry_of_birth: Annotated[str, Facets(pattern=r"[A-Z]{2,2}")] = Field(alias="CtryOfBirth")


class DateType2Choice(ChoiceModel):
    cd: Annotated[str | None, Facets(min_length=1, max_length=4)] = Field(None, alias="Cd")
    prtry: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(None, alias="Prtry")


class DateAndType1(ISOModel):
    tp: DateType2Choice = Field(alias="Tp")
    dt: ISODate = Field(alias="Dt")


class DocumentAdjustment1(ISOModel):
    amt: ActiveOrHistoricCurrencyAndAmount = Field(alias="Amt")
    cdt_dbt_ind: CreditDebitCode | None = Field(None, alias="CdtDbtInd")
    rsn: Annotated[str | None, Facets(min_length=1, max_length=4)] = Field(None, alias="Rsn")
    addtl_inf: Annotated[str | None, Facets(min_length=1, max_length=140)] = Field(
        None, alias="AddtlInf"
    )


class DocumentAmountType1Choice(ChoiceModel):
    cd: Annotated[str | None, Facets(min_length=1, max_length=4)] = Field(None, alias="Cd")
    prtry: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(None, alias="Prtry")


class DocumentAmount1(ISOModel):
    tp: DocumentAmountType1Choice = Field(alias="Tp")
    amt: ActiveOrHistoricCurrencyAndAmount = Field(alias="Amt")


class DocumentLineType1Choice(ChoiceModel):
    cd: Annotated[str | None, Facets(min_length=1, max_length=4)] = Field(None, alias="Cd")
    prtry: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(None, alias="Prtry")


class DocumentLineType1(ISOModel):
    cd_or_prtry: DocumentLineType1Choice = Field(alias="CdOrPrtry")
    issr: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(None, alias="Issr")


class DocumentLineIdentification1(ISOModel):
    tp: DocumentLineType1 | None = Field(None, alias="Tp")
    nb: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(None, alias="Nb")
    rltd_dt: ISODate | None = Field(None, alias="RltdDt")


class RemittanceAmount4(ISOModel):
    rmt_amt_and_tp: list[DocumentAmount1] | None = Field(None, alias="RmtAmtAndTp")
    adjstmnt_amt_and_rsn: list[DocumentAdjustment1] | None = Field(None, alias="AdjstmntAmtAndRsn")


class DocumentLineInformation2(ISOModel):
    id: list[DocumentLineIdentification1] = Field(alias="Id")
    desc: Annotated[str | None, Facets(min_length=1, max_length=2048)] = Field(None, alias="Desc")
    amt: RemittanceAmount4 | None = Field(None, alias="Amt")


class DocumentType2Choice(ChoiceModel):
    cd: Annotated[str | None, Facets(min_length=1, max_length=4)] = Field(None, alias="Cd")
    prtry: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(None, alias="Prtry")


class DocumentType1(ISOModel):
    cd_or_prtry: DocumentType2Choice = Field(alias="CdOrPrtry")
    issr: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(None, alias="Issr")


class ExchangeRate1(ISOModel):
    unit_ccy: Annotated[str | None, Facets(pattern=r"[A-Z]{3,3}")] = Field(None, alias="UnitCcy")
    xchg_rate: Decimal | None = Field(None, alias="XchgRate")
    rate_tp: ExchangeRateType1Code | None = Field(None, alias="RateTp")
    ctrct_id: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(
        None, alias="CtrctId"
    )


class GarnishmentType1Choice(ChoiceModel):
    cd: Annotated[str | None, Facets(min_length=1, max_length=4)] = Field(None, alias="Cd")
    prtry: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(None, alias="Prtry")


class GarnishmentType1(ISOModel):
    cd_or_prtry: GarnishmentType1Choice = Field(alias="CdOrPrtry")
    issr: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(None, alias="Issr")


class OrganisationIdentificationSchemeName1Choice(ChoiceModel):
    cd: Annotated[str | None, Facets(min_length=1, max_length=4)] = Field(None, alias="Cd")
    prtry: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(None, alias="Prtry")


class GenericOrganisationIdentification3(ISOModel):
    id: Annotated[str, Facets(min_length=1, max_length=256)] = Field(alias="Id")
    schme_nm: OrganisationIdentificationSchemeName1Choice | None = Field(None, alias="SchmeNm")
    issr: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(None, alias="Issr")


class OrganisationIdentification39(ISOModel):
    any_bic: Annotated[
        str | None, Facets(pattern=r"[A-Z0-9]{4,4}[A-Z]{2,2}[A-Z0-9]{2,2}([A-Z0-9]{3,3}){0,1}")
    ] = Field(None, alias="AnyBIC")
    lei: Annotated[str | None, Facets(pattern=r"[A-Z0-9]{18,18}[0-9]{2,2}")] = Field(
        None, alias="LEI"
    )
    othr: list[GenericOrganisationIdentification3] | None = Field(None, alias="Othr")


class PersonIdentificationSchemeName1Choice(ChoiceModel):
    cd: Annotated[str | None, Facets(min_length=1, max_length=4)] = Field(None, alias="Cd")
    prtry: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(None, alias="Prtry")


class GenericPersonIdentification2(ISOModel):
    id: Annotated[str, Facets(min_length=1, max_length=256)] = Field(alias="Id")
    schme_nm: PersonIdentificationSchemeName1Choice | None = Field(None, alias="SchmeNm")
    issr: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(None, alias="Issr")


class PersonIdentification18(ISOModel):
    dt_and_plc_of_birth: DateAndPlaceOfBirth1 | None = Field(None, alias="DtAndPlcOfBirth")
    othr: list[GenericPersonIdentification2] | None = Field(None, alias="Othr")


class Party52Choice(ChoiceModel):
    org_id: OrganisationIdentification39 | None = Field(None, alias="OrgId")
    prvt_id: PersonIdentification18 | None = Field(None, alias="PrvtId")


class PartyIdentification272(ISOModel):
    nm: Annotated[str | None, Facets(min_length=1, max_length=140)] = Field(None, alias="Nm")
    pstl_adr: PostalAddress27 | None = Field(None, alias="PstlAdr")
    id: Party52Choice | None = Field(None, alias="Id")
    ctry_of_res: Annotated[str | None, Facets(pattern=r"[A-Z]{2,2}")] = Field(
        None, alias="CtryOfRes"
    )
    ctct_dtls: Contact13 | None = Field(None, alias="CtctDtls")


class Garnishment4(ISOModel):
    tp: GarnishmentType1 = Field(alias="Tp")
    grnshee: PartyIdentification272 | None = Field(None, alias="Grnshee")
    grnshmt_admstr: PartyIdentification272 | None = Field(None, alias="GrnshmtAdmstr")
    ref_nb: Annotated[str | None, Facets(min_length=1, max_length=140)] = Field(
        None, alias="RefNb"
    )
    dt: ISODate | None = Field(None, alias="Dt")
    rmtd_amt: ActiveOrHistoricCurrencyAndAmount | None = Field(None, alias="RmtdAmt")
    fmly_mdcl_insrnc_ind: bool | None = Field(None, alias="FmlyMdclInsrncInd")
    mplyee_termntn_ind: bool | None = Field(None, alias="MplyeeTermntnInd")


class GroupHeader122(ISOModel):
    msg_id: Annotated[str, Facets(min_length=1, max_length=35)] = Field(alias="MsgId")
    cre_dt_tm: ISODateTime = Field(alias="CreDtTm")
    authstn: list[Authorisation1Choice] | None = Field(None, alias="Authstn")
    cpy_ind: CopyDuplicate1Code | None = Field(None, alias="CpyInd")
    initg_pty: PartyIdentification272 = Field(alias="InitgPty")
    msg_rcpt: PartyIdentification272 | None = Field(None, alias="MsgRcpt")
    fwdg_agt: BranchAndFinancialInstitutionIdentification8 | None = Field(None, alias="FwdgAgt")


class LocalInstrument2Choice(ChoiceModel):
    cd: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(None, alias="Cd")
    prtry: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(None, alias="Prtry")


class NameAndAddress18(ISOModel):
    nm: Annotated[str, Facets(min_length=1, max_length=140)] = Field(alias="Nm")
    adr: PostalAddress27 = Field(alias="Adr")


class ServiceLevel8Choice(ChoiceModel):
    cd: Annotated[str | None, Facets(min_length=1, max_length=4)] = Field(None, alias="Cd")
    prtry: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(None, alias="Prtry")


class PaymentTypeInformation26(ISOModel):
    instr_prty: Priority2Code | None = Field(None, alias="InstrPrty")
    svc_lvl: list[ServiceLevel8Choice] | None = Field(None, alias="SvcLvl")
    lcl_instrm: LocalInstrument2Choice | None = Field(None, alias="LclInstrm")
    ctgy_purp: CategoryPurpose1Choice | None = Field(None, alias="CtgyPurp")


class TransactionReferences8(ISOModel):
    pmt_inf_id: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(
        None, alias="PmtInfId"
    )
    instr_id: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(
        None, alias="InstrId"
    )
    end_to_end_id: Annotated[str, Facets(min_length=1, max_length=35)] = Field(alias="EndToEndId")
    tx_id: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(None, alias="TxId")
    uetr: Annotated[
        str | None, Facets(pattern=r"[a-f0-9]{8}-[a-f0-9]{4}-4[a-f0-9]{3}-[89ab][a-f0-9]{3}-[a-f0-9]{12}")
    ] = Field(None, alias="UETR")
    mndt_id: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(
        None, alias="MndtId"
    )
    cdtr_schme_id: PartyIdentification272 | None = Field(None, alias="CdtrSchmeId")


class OriginalPaymentInformation10(ISOModel):
    refs: TransactionReferences8 = Field(alias="Refs")
    pmt_tp_inf: PaymentTypeInformation26 | None = Field(None, alias="PmtTpInf")
    amt: AmountType3Choice | None = Field(None, alias="Amt")
    xchg_rate_inf: ExchangeRate1 | None = Field(None, alias="XchgRateInf")
    reqd_exctn_dt: DateAndDateTime2Choice | None = Field(None, alias="ReqdExctnDt")
    reqd_colltn_dt: ISODate | None = Field(None, alias="ReqdColltnDt")
    dbtr: PartyIdentification272 | None = Field(None, alias="Dbtr")
    dbtr_acct: CashAccount40 | None = Field(None, alias="DbtrAcct")
    dbtr_agt: BranchAndFinancialInstitutionIdentification8 | None = Field(None, alias="DbtrAgt")
    cdtr: PartyIdentification272 | None = Field(None, alias="Cdtr")
    cdtr_acct: CashAccount40 | None = Field(None, alias="CdtrAcct")
    cdtr_agt: BranchAndFinancialInstitutionIdentification8 | None = Field(None, alias="CdtrAgt")


class ReferredDocumentInformation8(ISOModel):
    tp: DocumentType1 | None = Field(None, alias="Tp")
    nb: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(None, alias="Nb")
    rltd_dt: DateAndType1 | None = Field(None, alias="RltdDt")
    line_dtls: list[DocumentLineInformation2] | None = Field(None, alias="LineDtls")


class TaxParty1(ISOModel):
    tax_id: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(None, alias="TaxId")
    regn_id: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(
        None, alias="RegnId"
    )
    tax_tp: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(None, alias="TaxTp")


class TaxAuthorisation1(ISOModel):
    titl: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(None, alias="Titl")
    nm: Annotated[str | None, Facets(min_length=1, max_length=140)] = Field(None, alias="Nm")


class TaxParty2(ISOModel):
    tax_id: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(None, alias="TaxId")
    regn_id: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(
        None, alias="RegnId"
    )
    tax_tp: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(None, alias="TaxTp")
    authstn: TaxAuthorisation1 | None = Field(None, alias="Authstn")


class TaxRecordDetails3(ISOModel):
    prd: TaxPeriod3 | None = Field(None, alias="Prd")
    amt: ActiveOrHistoricCurrencyAndAmount = Field(alias="Amt")


class TaxAmount3(ISOModel):
    rate: Decimal | None = Field(None, alias="Rate")
    taxbl_base_amt: ActiveOrHistoricCurrencyAndAmount | None = Field(None, alias="TaxblBaseAmt")
    ttl_amt: ActiveOrHistoricCurrencyAndAmount | None = Field(None, alias="TtlAmt")
    dtls: list[TaxRecordDetails3] | None = Field(None, alias="Dtls")


class TaxRecord3(ISOModel):
    tp: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(None, alias="Tp")
    ctgy: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(None, alias="Ctgy")
    ctgy_dtls: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(
        None, alias="CtgyDtls"
    )
    dbtr_sts: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(
        None, alias="DbtrSts"
    )
    cert_id: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(
        None, alias="CertId"
    )
    frms_cd: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(
        None, alias="FrmsCd"
    )
    prd: TaxPeriod3 | None = Field(None, alias="Prd")
    tax_amt: TaxAmount3 | None = Field(None, alias="TaxAmt")
    addtl_inf: Annotated[str | None, Facets(min_length=1, max_length=140)] = Field(
        None, alias="AddtlInf"
    )


class TaxData1(ISOModel):
    cdtr: TaxParty1 | None = Field(None, alias="Cdtr")
    dbtr: TaxParty2 | None = Field(None, alias="Dbtr")
    ultmt_dbtr: TaxParty2 | None = Field(None, alias="UltmtDbtr")
    admstn_zone: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(
        None, alias="AdmstnZone"
    )
    ref_nb: Annotated[str | None, Facets(min_length=1, max_length=140)] = Field(
        None, alias="RefNb"
    )
    mtd: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(None, alias="Mtd")
    ttl_taxbl_base_amt: ActiveOrHistoricCurrencyAndAmount | None = Field(
        None, alias="TtlTaxblBaseAmt"
    )
    ttl_tax_amt: ActiveOrHistoricCurrencyAndAmount | None = Field(None, alias="TtlTaxAmt")
    dt: ISODate | None = Field(None, alias="Dt")
    seq_nb: Decimal | None = Field(None, alias="SeqNb")
    rcrd: list[TaxRecord3] | None = Field(None, alias="Rcrd")


class StructuredRemittanceInformation18(ISOModel):
    rfrd_doc_inf: list[ReferredDocumentInformation8] | None = Field(None, alias="RfrdDocInf")
    rfrd_doc_amt: RemittanceAmount4 | None = Field(None, alias="RfrdDocAmt")
    cdtr_ref_inf: CreditorReferenceInformation3 | None = Field(None, alias="CdtrRefInf")
    invcr: PartyIdentification272 | None = Field(None, alias="Invcr")
    invcee: PartyIdentification272 | None = Field(None, alias="Invcee")
    tax_rmt: TaxData1 | None = Field(None, alias="TaxRmt")
    grnshmt_rmt: Garnishment4 | None = Field(None, alias="GrnshmtRmt")
    addtl_rmt_inf: Annotated[list[str] | None, Facets(min_length=1, max_length=140)] = Field(
        None, alias="AddtlRmtInf"
    )


class RemittanceInformation23(ISOModel):
    rmt_id: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(None, alias="RmtId")
    ustrd: Annotated[list[str] | None, Facets(min_length=1, max_length=140)] = Field(
        None, alias="Ustrd"
    )
    strd: list[StructuredRemittanceInformation18] | None = Field(None, alias="Strd")
    orgnl_pmt_inf: OriginalPaymentInformation10 = Field(alias="OrgnlPmtInf")


class RemittanceLocationData2(ISOModel):
    mtd: RemittanceLocationMethod2Code = Field(alias="Mtd")
    elctrnc_adr: Annotated[str | None, Facets(min_length=1, max_length=2048)] = Field(
        None, alias="ElctrncAdr"
    )
    pstl_adr: NameAndAddress18 | None = Field(None, alias="PstlAdr")


class RemittanceLocation10(ISOModel):
    rmt_id: Annotated[str | None, Facets(min_length=1, max_length=35)] = Field(None, alias="RmtId")
    rmt_lctn_dtls: list[RemittanceLocationData2] = Field(alias="RmtLctnDtls")
    refs: TransactionReferences8 = Field(alias="Refs")


class SupplementaryData1(ISOModel):
    plc_and_nm: Annotated[str | None, Facets(min_length=1, max_length=350)] = Field(
        None, alias="PlcAndNm"
    )
    envlp: SupplementaryDataEnvelope1 = Field(alias="Envlp")
