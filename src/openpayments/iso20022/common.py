"""
Types shared by more than one message in the catalog.

A type is declared here once when every message that uses it defines it identically, including
the types it refers to. Messages whose definition of the same name differs keep their own.
"""

from decimal import Decimal
from enum import Enum

from pydantic import ConfigDict, Field

from openpayments.domain.models import ChoiceModel, ISOModel, attribute, content
from openpayments.domain.types import SimpleDecimal, SimpleText


class ExternalAccountIdentification1Code(SimpleText):
    min_length = 1
    max_length = 4


class Max35Text(SimpleText):
    min_length = 1
    max_length = 35


class AccountSchemeName1Choice(ChoiceModel):
    cd: ExternalAccountIdentification1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class Max34Text(SimpleText):
    min_length = 1
    max_length = 34


class GenericAccountIdentification1(ISOModel):
    id: Max34Text = Field(alias="Id")
    schme_nm: AccountSchemeName1Choice | None = Field(None, alias="SchmeNm")
    issr: Max35Text | None = Field(None, alias="Issr")


class IBAN2007Identifier(SimpleText):
    """International Bank Account Number (ISO 13616)."""

    pattern = r"[A-Z]{2,2}[0-9]{2,2}[a-zA-Z0-9]{1,30}"


class AccountIdentification4Choice(ChoiceModel):
    iban: IBAN2007Identifier | None = Field(None, alias="IBAN")
    othr: GenericAccountIdentification1 | None = Field(None, alias="Othr")


class ActiveCurrencyAndAmountSimpleType(SimpleDecimal):
    min_inclusive = Decimal("0")


class ActiveCurrencyCode(SimpleText):
    """Three letter code of a currency currently in use (ISO 4217)."""

    pattern = r"[A-Z]{3,3}"


class ActiveCurrencyAndAmount(ISOModel):
    ccy: ActiveCurrencyCode = attribute("Ccy")
    value: ActiveCurrencyAndAmountSimpleType = content()


class ActiveOrHistoricCurrencyAnd20DecimalAmountSimpleType(SimpleDecimal):
    min_inclusive = Decimal("0")


class ActiveOrHistoricCurrencyCode(SimpleText):
    """Three letter code of a current or past currency (ISO 4217)."""

    pattern = r"[A-Z]{3,3}"


class ActiveOrHistoricCurrencyAnd20DecimalAmount(ISOModel):
    ccy: ActiveOrHistoricCurrencyCode = attribute("Ccy")
    value: ActiveOrHistoricCurrencyAnd20DecimalAmountSimpleType = content()


class ActiveOrHistoricCurrencyAndAmountSimpleType(SimpleDecimal):
    min_inclusive = Decimal("0")


class ActiveOrHistoricCurrencyAndAmount(ISOModel):
    ccy: ActiveOrHistoricCurrencyCode = attribute("Ccy")
    value: ActiveOrHistoricCurrencyAndAmountSimpleType = content()


class AddressType2Code(str, Enum):
    ADDR = "ADDR"
    PBOX = "PBOX"
    HOME = "HOME"
    BIZZ = "BIZZ"
    MLTO = "MLTO"
    DLVY = "DLVY"


class Exact4AlphaNumericText(SimpleText):
    pattern = r"[a-zA-Z0-9]{4}"


class GenericIdentification30(ISOModel):
    id: Exact4AlphaNumericText = Field(alias="Id")
    issr: Max35Text = Field(alias="Issr")
    schme_nm: Max35Text | None = Field(None, alias="SchmeNm")


class AddressType3Choice(ChoiceModel):
    cd: AddressType2Code | None = Field(None, alias="Cd")
    prtry: GenericIdentification30 | None = Field(None, alias="Prtry")


class Amount2Choice(ChoiceModel):
    amt_wtht_ccy: Decimal | None = Field(None, alias="AmtWthtCcy")
    amt_wth_ccy: ActiveCurrencyAndAmount | None = Field(None, alias="AmtWthCcy")


class AnyBICDec2014Identifier(SimpleText):
    """Business identifier code of any organisation (ISO 9362)."""

    pattern = r"[A-Z0-9]{4,4}[A-Z]{2,2}[A-Z0-9]{2,2}([A-Z0-9]{3,3}){0,1}"


class ExternalBankTransactionFamily1Code(SimpleText):
    min_length = 1
    max_length = 4


class ExternalBankTransactionSubFamily1Code(SimpleText):
    min_length = 1
    max_length = 4


class BankTransactionCodeStructure6(ISOModel):
    cd: ExternalBankTransactionFamily1Code = Field(alias="Cd")
    sub_fmly_cd: ExternalBankTransactionSubFamily1Code = Field(alias="SubFmlyCd")


class ExternalBankTransactionDomain1Code(SimpleText):
    min_length = 1
    max_length = 4


class BankTransactionCodeStructure5(ISOModel):
    cd: ExternalBankTransactionDomain1Code = Field(alias="Cd")
    fmly: BankTransactionCodeStructure6 = Field(alias="Fmly")


class ProprietaryBankTransactionCodeStructure1(ISOModel):
    cd: Max35Text = Field(alias="Cd")
    issr: Max35Text | None = Field(None, alias="Issr")


class BankTransactionCodeStructure4(ISOModel):
    domn: BankTransactionCodeStructure5 | None = Field(None, alias="Domn")
    prtry: ProprietaryBankTransactionCodeStructure1 | None = Field(None, alias="Prtry")


class BaseOneRate(SimpleDecimal):
    """Rate expressed as a decimal fraction, e.g. 0.7 is 70%."""


class BICFIDec2014Identifier(SimpleText):
    """Business identifier code of a financial institution (ISO 9362)."""

    pattern = r"[A-Z0-9]{4,4}[A-Z]{2,2}[A-Z0-9]{2,2}([A-Z0-9]{3,3}){0,1}"


class LEIIdentifier(SimpleText):
    """Legal Entity Identifier (ISO 17442)."""

    pattern = r"[A-Z0-9]{18,18}[0-9]{2,2}"


class Max140Text(SimpleText):
    min_length = 1
    max_length = 140


class CountryCode(SimpleText):
    """Two letter country code (ISO 3166)."""

    pattern = r"[A-Z]{2,2}"


class Max16Text(SimpleText):
    min_length = 1
    max_length = 16


class Max70Text(SimpleText):
    min_length = 1
    max_length = 70


class PostalAddress24(ISOModel):
    adr_tp: AddressType3Choice | None = Field(None, alias="AdrTp")
    dept: Max70Text | None = Field(None, alias="Dept")
    sub_dept: Max70Text | None = Field(None, alias="SubDept")
    strt_nm: Max70Text | None = Field(None, alias="StrtNm")
    bldg_nb: Max16Text | None = Field(None, alias="BldgNb")
    bldg_nm: Max35Text | None = Field(None, alias="BldgNm")
    flr: Max70Text | None = Field(None, alias="Flr")
    pst_bx: Max16Text | None = Field(None, alias="PstBx")
    room: Max70Text | None = Field(None, alias="Room")
    pst_cd: Max16Text | None = Field(None, alias="PstCd")
    twn_nm: Max35Text | None = Field(None, alias="TwnNm")
    twn_lctn_nm: Max35Text | None = Field(None, alias="TwnLctnNm")
    dstrct_nm: Max35Text | None = Field(None, alias="DstrctNm")
    ctry_sub_dvsn: Max35Text | None = Field(None, alias="CtrySubDvsn")
    ctry: CountryCode | None = Field(None, alias="Ctry")
    adr_line: list[Max70Text] | None = Field(None, alias="AdrLine")


class BranchData3(ISOModel):
    id: Max35Text | None = Field(None, alias="Id")
    lei: LEIIdentifier | None = Field(None, alias="LEI")
    nm: Max140Text | None = Field(None, alias="Nm")
    pstl_adr: PostalAddress24 | None = Field(None, alias="PstlAdr")


class ExternalClearingSystemIdentification1Code(SimpleText):
    min_length = 1
    max_length = 5


class ClearingSystemIdentification2Choice(ChoiceModel):
    cd: ExternalClearingSystemIdentification1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class ClearingSystemMemberIdentification2(ISOModel):
    clr_sys_id: ClearingSystemIdentification2Choice | None = Field(None, alias="ClrSysId")
    mmb_id: Max35Text = Field(alias="MmbId")


class ExternalFinancialInstitutionIdentification1Code(SimpleText):
    min_length = 1
    max_length = 4


class FinancialIdentificationSchemeName1Choice(ChoiceModel):
    cd: ExternalFinancialInstitutionIdentification1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class GenericFinancialIdentification1(ISOModel):
    id: Max35Text = Field(alias="Id")
    schme_nm: FinancialIdentificationSchemeName1Choice | None = Field(None, alias="SchmeNm")
    issr: Max35Text | None = Field(None, alias="Issr")


class FinancialInstitutionIdentification18(ISOModel):
    bicfi: BICFIDec2014Identifier | None = Field(None, alias="BICFI")
    clr_sys_mmb_id: ClearingSystemMemberIdentification2 | None = Field(None, alias="ClrSysMmbId")
    lei: LEIIdentifier | None = Field(None, alias="LEI")
    nm: Max140Text | None = Field(None, alias="Nm")
    pstl_adr: PostalAddress24 | None = Field(None, alias="PstlAdr")
    othr: GenericFinancialIdentification1 | None = Field(None, alias="Othr")


class BranchAndFinancialInstitutionIdentification6(ISOModel):
    fin_instn_id: FinancialInstitutionIdentification18 = Field(alias="FinInstnId")
    brnch_id: BranchData3 | None = Field(None, alias="BrnchId")


class PostalAddress27(ISOModel):
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


class BranchData5(ISOModel):
    id: Max35Text | None = Field(None, alias="Id")
    lei: LEIIdentifier | None = Field(None, alias="LEI")
    nm: Max140Text | None = Field(None, alias="Nm")
    pstl_adr: PostalAddress27 | None = Field(None, alias="PstlAdr")


class FinancialInstitutionIdentification23(ISOModel):
    bicfi: BICFIDec2014Identifier | None = Field(None, alias="BICFI")
    clr_sys_mmb_id: ClearingSystemMemberIdentification2 | None = Field(None, alias="ClrSysMmbId")
    lei: LEIIdentifier | None = Field(None, alias="LEI")
    nm: Max140Text | None = Field(None, alias="Nm")
    pstl_adr: PostalAddress27 | None = Field(None, alias="PstlAdr")
    othr: GenericFinancialIdentification1 | None = Field(None, alias="Othr")


class BranchAndFinancialInstitutionIdentification8(ISOModel):
    fin_instn_id: FinancialInstitutionIdentification23 = Field(alias="FinInstnId")
    brnch_id: BranchData5 | None = Field(None, alias="BrnchId")


class ExternalCashAccountType1Code(SimpleText):
    min_length = 1
    max_length = 4


class CashAccountType2Choice(ChoiceModel):
    cd: ExternalCashAccountType1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class Max2048Text(SimpleText):
    min_length = 1
    max_length = 2048


class ExternalProxyAccountType1Code(SimpleText):
    min_length = 1
    max_length = 4


class ProxyAccountType1Choice(ChoiceModel):
    cd: ExternalProxyAccountType1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class ProxyAccountIdentification1(ISOModel):
    tp: ProxyAccountType1Choice | None = Field(None, alias="Tp")
    id: Max2048Text = Field(alias="Id")


class CashAccount40(ISOModel):
    id: AccountIdentification4Choice | None = Field(None, alias="Id")
    tp: CashAccountType2Choice | None = Field(None, alias="Tp")
    ccy: ActiveOrHistoricCurrencyCode | None = Field(None, alias="Ccy")
    nm: Max70Text | None = Field(None, alias="Nm")
    prxy: ProxyAccountIdentification1 | None = Field(None, alias="Prxy")


class ChargeBearerType1Code(str, Enum):
    DEBT = "DEBT"
    CRED = "CRED"
    SHAR = "SHAR"
    SLEV = "SLEV"


ChargeIncludedIndicator = bool


class ExternalChargeType1Code(SimpleText):
    min_length = 1
    max_length = 4


class GenericIdentification3(ISOModel):
    id: Max35Text = Field(alias="Id")
    issr: Max35Text | None = Field(None, alias="Issr")


class ChargeType3Choice(ChoiceModel):
    cd: ExternalChargeType1Code | None = Field(None, alias="Cd")
    prtry: GenericIdentification3 | None = Field(None, alias="Prtry")


class CreditDebitCode(str, Enum):
    CRDT = "CRDT"
    DBIT = "DBIT"


class TaxCharges2(ISOModel):
    id: Max35Text | None = Field(None, alias="Id")
    rate: Decimal | None = Field(None, alias="Rate")
    amt: ActiveOrHistoricCurrencyAndAmount | None = Field(None, alias="Amt")


class ChargesRecord3(ISOModel):
    amt: ActiveOrHistoricCurrencyAndAmount = Field(alias="Amt")
    cdt_dbt_ind: CreditDebitCode | None = Field(None, alias="CdtDbtInd")
    chrg_incl_ind: bool | None = Field(None, alias="ChrgInclInd")
    tp: ChargeType3Choice | None = Field(None, alias="Tp")
    rate: Decimal | None = Field(None, alias="Rate")
    br: ChargeBearerType1Code | None = Field(None, alias="Br")
    agt: BranchAndFinancialInstitutionIdentification6 | None = Field(None, alias="Agt")
    tax: TaxCharges2 | None = Field(None, alias="Tax")


class Charges6(ISOModel):
    ttl_chrgs_and_tax_amt: ActiveOrHistoricCurrencyAndAmount | None = Field(
        None, alias="TtlChrgsAndTaxAmt"
    )
    rcrd: list[ChargesRecord3] | None = Field(None, alias="Rcrd")


class ClearingChannel2Code(str, Enum):
    RTGS = "RTGS"
    RTNS = "RTNS"
    MPNS = "MPNS"
    BOOK = "BOOK"


class Max4AlphaNumericText(SimpleText):
    min_length = 1
    max_length = 4
    pattern = r"[a-zA-Z0-9]{1,4}"


class GenericIdentification13(ISOModel):
    id: Max4AlphaNumericText = Field(alias="Id")
    schme_nm: Max35Text | None = Field(None, alias="SchmeNm")
    issr: Max35Text = Field(alias="Issr")


class Max4Text(SimpleText):
    min_length = 1
    max_length = 4


class CodeOrProprietary1Choice(ChoiceModel):
    cd: Max4Text | None = Field(None, alias="Cd")
    prtry: GenericIdentification13 | None = Field(None, alias="Prtry")


class Max256Text(SimpleText):
    min_length = 1
    max_length = 256


class NamePrefix2Code(str, Enum):
    DOCT = "DOCT"
    MADM = "MADM"
    MISS = "MISS"
    MIST = "MIST"
    MIKS = "MIKS"


class Max128Text(SimpleText):
    min_length = 1
    max_length = 128


class OtherContact1(ISOModel):
    chanl_tp: Max4Text = Field(alias="ChanlTp")
    id: Max128Text | None = Field(None, alias="Id")


class PhoneNumber(SimpleText):
    """Phone number in +CC-NNN form."""

    pattern = r"\+[0-9]{1,3}-[0-9()+\-]{1,30}"


class PreferredContactMethod2Code(str, Enum):
    MAIL = "MAIL"
    FAXX = "FAXX"
    LETT = "LETT"
    CELL = "CELL"
    ONLI = "ONLI"
    PHON = "PHON"


class Contact13(ISOModel):
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


class PreferredContactMethod1Code(str, Enum):
    LETT = "LETT"
    MAIL = "MAIL"
    PHON = "PHON"
    FAXX = "FAXX"
    CELL = "CELL"


class Contact4(ISOModel):
    nm_prfx: NamePrefix2Code | None = Field(None, alias="NmPrfx")
    nm: Max140Text | None = Field(None, alias="Nm")
    phne_nb: PhoneNumber | None = Field(None, alias="PhneNb")
    mob_nb: PhoneNumber | None = Field(None, alias="MobNb")
    fax_nb: PhoneNumber | None = Field(None, alias="FaxNb")
    email_adr: Max2048Text | None = Field(None, alias="EmailAdr")
    email_purp: Max35Text | None = Field(None, alias="EmailPurp")
    job_titl: Max35Text | None = Field(None, alias="JobTitl")
    rspnsblty: Max35Text | None = Field(None, alias="Rspnsblty")
    dept: Max70Text | None = Field(None, alias="Dept")
    othr: list[OtherContact1] | None = Field(None, alias="Othr")
    prefrd_mtd: PreferredContactMethod1Code | None = Field(None, alias="PrefrdMtd")


class CopyDuplicate1Code(str, Enum):
    CODU = "CODU"
    COPY = "COPY"
    DUPL = "DUPL"


class DocumentType3Code(str, Enum):
    RADM = "RADM"
    RPIN = "RPIN"
    FXDR = "FXDR"
    DISP = "DISP"
    PUOR = "PUOR"
    SCOR = "SCOR"


class CreditorReferenceType1Choice(ChoiceModel):
    cd: DocumentType3Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class CreditorReferenceType2(ISOModel):
    cd_or_prtry: CreditorReferenceType1Choice = Field(alias="CdOrPrtry")
    issr: Max35Text | None = Field(None, alias="Issr")


class CreditorReferenceInformation2(ISOModel):
    tp: CreditorReferenceType2 | None = Field(None, alias="Tp")
    ref: Max35Text | None = Field(None, alias="Ref")


class ISODate(SimpleText):
    """Calendar date in YYYY-MM-DD form."""


class ISODateTime(SimpleText):
    """Date and time in ISO 8601 form, with or without UTC offset."""


class DateAndDateTime2Choice(ChoiceModel):
    dt: ISODate | None = Field(None, alias="Dt")
    dt_tm: ISODateTime | None = Field(None, alias="DtTm")


class DateAndPlaceOfBirth1(ISOModel):
    birth_dt: ISODate = Field(alias="BirthDt")
    prvc_of_birth: Max35Text | None = Field(None, alias="PrvcOfBirth")
    city_of_birth: Max35Text = Field(alias="CityOfBirth")
    ctry_of_birth: CountryCode = Field(alias="CtryOfBirth")


class DatePeriod2(ISOModel):
    fr_dt: ISODate = Field(alias="FrDt")
    to_dt: ISODate = Field(alias="ToDt")


class DateTimePeriod1(ISOModel):
    fr_dt_tm: ISODateTime = Field(alias="FrDtTm")
    to_dt_tm: ISODateTime = Field(alias="ToDtTm")


class DecimalNumber(SimpleDecimal):
    pass


class ExternalDiscountAmountType1Code(SimpleText):
    min_length = 1
    max_length = 4


class DiscountAmountType1Choice(ChoiceModel):
    cd: ExternalDiscountAmountType1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class DiscountAmountAndType1(ISOModel):
    tp: DiscountAmountType1Choice | None = Field(None, alias="Tp")
    amt: ActiveOrHistoricCurrencyAndAmount = Field(alias="Amt")


class DocumentAdjustment1(ISOModel):
    amt: ActiveOrHistoricCurrencyAndAmount = Field(alias="Amt")
    cdt_dbt_ind: CreditDebitCode | None = Field(None, alias="CdtDbtInd")
    rsn: Max4Text | None = Field(None, alias="Rsn")
    addtl_inf: Max140Text | None = Field(None, alias="AddtlInf")


class ExternalDocumentLineType1Code(SimpleText):
    min_length = 1
    max_length = 4


class DocumentLineType1Choice(ChoiceModel):
    cd: ExternalDocumentLineType1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class DocumentLineType1(ISOModel):
    cd_or_prtry: DocumentLineType1Choice = Field(alias="CdOrPrtry")
    issr: Max35Text | None = Field(None, alias="Issr")


class DocumentLineIdentification1(ISOModel):
    tp: DocumentLineType1 | None = Field(None, alias="Tp")
    nb: Max35Text | None = Field(None, alias="Nb")
    rltd_dt: ISODate | None = Field(None, alias="RltdDt")


class ExternalTaxAmountType1Code(SimpleText):
    min_length = 1
    max_length = 4


class TaxAmountType1Choice(ChoiceModel):
    cd: ExternalTaxAmountType1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class TaxAmountAndType1(ISOModel):
    tp: TaxAmountType1Choice | None = Field(None, alias="Tp")
    amt: ActiveOrHistoricCurrencyAndAmount = Field(alias="Amt")


class RemittanceAmount3(ISOModel):
    due_pybl_amt: ActiveOrHistoricCurrencyAndAmount | None = Field(None, alias="DuePyblAmt")
    dscnt_apld_amt: list[DiscountAmountAndType1] | None = Field(None, alias="DscntApldAmt")
    cdt_note_amt: ActiveOrHistoricCurrencyAndAmount | None = Field(None, alias="CdtNoteAmt")
    tax_amt: list[TaxAmountAndType1] | None = Field(None, alias="TaxAmt")
    adjstmnt_amt_and_rsn: list[DocumentAdjustment1] | None = Field(None, alias="AdjstmntAmtAndRsn")
    rmtd_amt: ActiveOrHistoricCurrencyAndAmount | None = Field(None, alias="RmtdAmt")


class DocumentLineInformation1(ISOModel):
    id: list[DocumentLineIdentification1] = Field(alias="Id")
    desc: Max2048Text | None = Field(None, alias="Desc")
    amt: RemittanceAmount3 | None = Field(None, alias="Amt")


class DocumentType6Code(str, Enum):
    MSIN = "MSIN"
    CNFA = "CNFA"
    DNFA = "DNFA"
    CINV = "CINV"
    CREN = "CREN"
    DEBN = "DEBN"
    HIRI = "HIRI"
    SBIN = "SBIN"
    CMCN = "CMCN"
    SOAC = "SOAC"
    DISP = "DISP"
    BOLD = "BOLD"
    VCHR = "VCHR"
    AROI = "AROI"
    TSUT = "TSUT"
    PUOR = "PUOR"


class ExternalSystemErrorHandling1Code(SimpleText):
    min_length = 1
    max_length = 4


class ErrorHandling3Choice(ChoiceModel):
    cd: ExternalSystemErrorHandling1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class ErrorHandling5(ISOModel):
    err: ErrorHandling3Choice = Field(alias="Err")
    desc: Max140Text | None = Field(None, alias="Desc")


class Exact1NumericText(SimpleText):
    pattern = r"[0-9]"


class Exact3NumericText(SimpleText):
    pattern = r"[0-9]{3}"


class ExchangeRateType1Code(str, Enum):
    SPOT = "SPOT"
    SALE = "SALE"
    AGRD = "AGRD"


class ExternalAgreementType1Code(SimpleText):
    min_length = 1
    max_length = 4


class ExternalDocumentType1Code(SimpleText):
    min_length = 1
    max_length = 4


class ExternalEnquiryRequestType1Code(SimpleText):
    min_length = 1
    max_length = 4


class ExternalGarnishmentType1Code(SimpleText):
    min_length = 1
    max_length = 4


class ExternalLocalInstrument1Code(SimpleText):
    min_length = 1
    max_length = 35


class ExternalOrganisationIdentification1Code(SimpleText):
    min_length = 1
    max_length = 4


class ExternalPaymentControlRequestType1Code(SimpleText):
    min_length = 1
    max_length = 4


class ExternalPersonIdentification1Code(SimpleText):
    min_length = 1
    max_length = 4


class ExternalPurpose1Code(SimpleText):
    min_length = 1
    max_length = 4


class ExternalSystemPartyType1Code(SimpleText):
    min_length = 1
    max_length = 4


class FinancialInstrumentQuantity1Choice(ChoiceModel):
    unit: Decimal | None = Field(None, alias="Unit")
    face_amt: Decimal | None = Field(None, alias="FaceAmt")
    amtsd_val: Decimal | None = Field(None, alias="AmtsdVal")


class GarnishmentType1Choice(ChoiceModel):
    cd: ExternalGarnishmentType1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class GarnishmentType1(ISOModel):
    cd_or_prtry: GarnishmentType1Choice = Field(alias="CdOrPrtry")
    issr: Max35Text | None = Field(None, alias="Issr")


class OrganisationIdentificationSchemeName1Choice(ChoiceModel):
    cd: ExternalOrganisationIdentification1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class GenericOrganisationIdentification1(ISOModel):
    id: Max35Text = Field(alias="Id")
    schme_nm: OrganisationIdentificationSchemeName1Choice | None = Field(None, alias="SchmeNm")
    issr: Max35Text | None = Field(None, alias="Issr")


class OrganisationIdentification29(ISOModel):
    any_bic: AnyBICDec2014Identifier | None = Field(None, alias="AnyBIC")
    lei: LEIIdentifier | None = Field(None, alias="LEI")
    othr: list[GenericOrganisationIdentification1] | None = Field(None, alias="Othr")


class PersonIdentificationSchemeName1Choice(ChoiceModel):
    cd: ExternalPersonIdentification1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class GenericPersonIdentification1(ISOModel):
    id: Max35Text = Field(alias="Id")
    schme_nm: PersonIdentificationSchemeName1Choice | None = Field(None, alias="SchmeNm")
    issr: Max35Text | None = Field(None, alias="Issr")


class PersonIdentification13(ISOModel):
    dt_and_plc_of_birth: DateAndPlaceOfBirth1 | None = Field(None, alias="DtAndPlcOfBirth")
    othr: list[GenericPersonIdentification1] | None = Field(None, alias="Othr")


class Party38Choice(ChoiceModel):
    org_id: OrganisationIdentification29 | None = Field(None, alias="OrgId")
    prvt_id: PersonIdentification13 | None = Field(None, alias="PrvtId")


class PartyIdentification135(ISOModel):
    nm: Max140Text | None = Field(None, alias="Nm")
    pstl_adr: PostalAddress24 | None = Field(None, alias="PstlAdr")
    id: Party38Choice | None = Field(None, alias="Id")
    ctry_of_res: CountryCode | None = Field(None, alias="CtryOfRes")
    ctct_dtls: Contact4 | None = Field(None, alias="CtctDtls")


class Garnishment3(ISOModel):
    tp: GarnishmentType1 = Field(alias="Tp")
    grnshee: PartyIdentification135 | None = Field(None, alias="Grnshee")
    grnshmt_admstr: PartyIdentification135 | None = Field(None, alias="GrnshmtAdmstr")
    ref_nb: Max140Text | None = Field(None, alias="RefNb")
    dt: ISODate | None = Field(None, alias="Dt")
    rmtd_amt: ActiveOrHistoricCurrencyAndAmount | None = Field(None, alias="RmtdAmt")
    fmly_mdcl_insrnc_ind: bool | None = Field(None, alias="FmlyMdclInsrncInd")
    mplyee_termntn_ind: bool | None = Field(None, alias="MplyeeTermntnInd")


class GenericIdentification1(ISOModel):
    id: Max35Text = Field(alias="Id")
    schme_nm: Max35Text | None = Field(None, alias="SchmeNm")
    issr: Max35Text | None = Field(None, alias="Issr")


class Max72Text(SimpleText):
    min_length = 1
    max_length = 72


class GenericIdentification175(ISOModel):
    id: Max72Text = Field(alias="Id")
    schme_nm: Max35Text | None = Field(None, alias="SchmeNm")
    issr: Max35Text | None = Field(None, alias="Issr")


class GenericIdentification36(ISOModel):
    id: Max35Text = Field(alias="Id")
    issr: Max35Text = Field(alias="Issr")
    schme_nm: Max35Text | None = Field(None, alias="SchmeNm")


class GenericOrganisationIdentification3(ISOModel):
    id: Max256Text = Field(alias="Id")
    schme_nm: OrganisationIdentificationSchemeName1Choice | None = Field(None, alias="SchmeNm")
    issr: Max35Text | None = Field(None, alias="Issr")


class GenericPersonIdentification2(ISOModel):
    id: Max256Text = Field(alias="Id")
    schme_nm: PersonIdentificationSchemeName1Choice | None = Field(None, alias="SchmeNm")
    issr: Max35Text | None = Field(None, alias="Issr")


class ImpliedCurrencyAndAmount(SimpleDecimal):
    min_inclusive = Decimal("0")


class ISINOct2015Identifier(SimpleText):
    """International Securities Identification Number (ISO 6166)."""

    pattern = r"[A-Z]{2,2}[A-Z0-9]{9,9}[0-9]{1,1}"


class ISOYear(SimpleText):
    """Year in YYYY form."""


class LocalInstrument2Choice(ChoiceModel):
    cd: ExternalLocalInstrument1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class LockStatus1Code(str, Enum):
    LOCK = "LOCK"
    ULCK = "ULCK"


class LongFraction19DecimalNumber(SimpleDecimal):
    pass


class RateBasis1Code(str, Enum):
    DAYS = "DAYS"
    MNTH = "MNTH"
    WEEK = "WEEK"
    YEAR = "YEAR"


class MaturityTerm2(ISOModel):
    unit: RateBasis1Code = Field(alias="Unit")
    val: Decimal = Field(alias="Val")


class Max1000Text(SimpleText):
    min_length = 1
    max_length = 1000


class Max1025Text(SimpleText):
    min_length = 1
    max_length = 1025


class Max105Text(SimpleText):
    min_length = 1
    max_length = 105


class Max10KBinary(SimpleText):
    min_length = 1
    max_length = 10240


class Max10Text(SimpleText):
    min_length = 1
    max_length = 10


class Max15NumericText(SimpleText):
    pattern = r"[0-9]{1,15}"


class Max15PlusSignedNumericText(SimpleText):
    pattern = r"[\+]{0,1}[0-9]{1,15}"


class Max210Text(SimpleText):
    min_length = 1
    max_length = 210


class Max350Text(SimpleText):
    min_length = 1
    max_length = 350


class Max3Number(SimpleDecimal):
    pass


class Max3NumericText(SimpleText):
    pattern = r"[0-9]{1,3}"


class Max500Text(SimpleText):
    min_length = 1
    max_length = 500


class Max52Text(SimpleText):
    min_length = 1
    max_length = 52


class Max5NumericText(SimpleText):
    pattern = r"[0-9]{1,5}"


class Max6Text(SimpleText):
    min_length = 1
    max_length = 6


class MessageIdentification1(ISOModel):
    id: Max35Text = Field(alias="Id")
    cre_dt_tm: ISODateTime = Field(alias="CreDtTm")


class NameAndAddress16(ISOModel):
    nm: Max140Text = Field(alias="Nm")
    adr: PostalAddress24 = Field(alias="Adr")


class PostalAddress1(ISOModel):
    adr_tp: AddressType2Code | None = Field(None, alias="AdrTp")
    adr_line: list[Max70Text] | None = Field(None, alias="AdrLine")
    strt_nm: Max70Text | None = Field(None, alias="StrtNm")
    bldg_nb: Max16Text | None = Field(None, alias="BldgNb")
    pst_cd: Max16Text | None = Field(None, alias="PstCd")
    twn_nm: Max35Text | None = Field(None, alias="TwnNm")
    ctry_sub_dvsn: Max35Text | None = Field(None, alias="CtrySubDvsn")
    ctry: CountryCode = Field(alias="Ctry")


class NameAndAddress5(ISOModel):
    nm: Max350Text = Field(alias="Nm")
    adr: PostalAddress1 | None = Field(None, alias="Adr")


class NoReasonCode(str, Enum):
    NORE = "NORE"


class Number(SimpleDecimal):
    pass


class OrganisationIdentification38(ISOModel):
    id: GenericIdentification175 = Field(alias="Id")
    nm: Max105Text | None = Field(None, alias="Nm")
    dmcl: Max500Text | None = Field(None, alias="Dmcl")


class OrganisationIdentification15Choice(ChoiceModel):
    lei: LEIIdentifier | None = Field(None, alias="LEI")
    othr: OrganisationIdentification38 | None = Field(None, alias="Othr")
    any_bic: AnyBICDec2014Identifier | None = Field(None, alias="AnyBIC")


class OrganisationIdentification39(ISOModel):
    any_bic: AnyBICDec2014Identifier | None = Field(None, alias="AnyBIC")
    lei: LEIIdentifier | None = Field(None, alias="LEI")
    othr: list[GenericOrganisationIdentification3] | None = Field(None, alias="Othr")


class OriginalBusinessQuery1(ISOModel):
    msg_id: Max35Text = Field(alias="MsgId")
    msg_nm_id: Max35Text | None = Field(None, alias="MsgNmId")
    cre_dt_tm: ISODateTime | None = Field(None, alias="CreDtTm")


class Pagination1(ISOModel):
    pg_nb: Max5NumericText = Field(alias="PgNb")
    last_pg_ind: bool = Field(alias="LastPgInd")


class Party40Choice(ChoiceModel):
    pty: PartyIdentification135 | None = Field(None, alias="Pty")
    agt: BranchAndFinancialInstitutionIdentification6 | None = Field(None, alias="Agt")


class PersonIdentification18(ISOModel):
    dt_and_plc_of_birth: DateAndPlaceOfBirth1 | None = Field(None, alias="DtAndPlcOfBirth")
    othr: list[GenericPersonIdentification2] | None = Field(None, alias="Othr")


class Party52Choice(ChoiceModel):
    org_id: OrganisationIdentification39 | None = Field(None, alias="OrgId")
    prvt_id: PersonIdentification18 | None = Field(None, alias="PrvtId")


class PartyIdentification120Choice(ChoiceModel):
    any_bic: AnyBICDec2014Identifier | None = Field(None, alias="AnyBIC")
    prtry_id: GenericIdentification36 | None = Field(None, alias="PrtryId")
    nm_and_adr: NameAndAddress5 | None = Field(None, alias="NmAndAdr")


class PartyIdentification136(ISOModel):
    id: PartyIdentification120Choice = Field(alias="Id")
    lei: LEIIdentifier | None = Field(None, alias="LEI")


class PartyIdentification272(ISOModel):
    nm: Max140Text | None = Field(None, alias="Nm")
    pstl_adr: PostalAddress27 | None = Field(None, alias="PstlAdr")
    id: Party52Choice | None = Field(None, alias="Id")
    ctry_of_res: CountryCode | None = Field(None, alias="CtryOfRes")
    ctct_dtls: Contact13 | None = Field(None, alias="CtctDtls")


class PartyLockStatus1(ISOModel):
    vld_fr: str | None = Field(None, alias="VldFr")
    sts: LockStatus1Code = Field(alias="Sts")
    lck_rsn: list[Max35Text] | None = Field(None, alias="LckRsn")


class PercentageRate(SimpleDecimal):
    """Rate expressed as a percentage, e.g. 0.7 is 0.7%."""


PlusOrMinusIndicator = bool


class Priority2Code(str, Enum):
    HIGH = "HIGH"
    NORM = "NORM"


class ProprietaryReference1(ISOModel):
    tp: Max35Text = Field(alias="Tp")
    ref: Max35Text = Field(alias="Ref")


class Purpose2Choice(ChoiceModel):
    cd: ExternalPurpose1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class ReferredDocumentType3Choice(ChoiceModel):
    cd: DocumentType6Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class ReferredDocumentType4(ISOModel):
    cd_or_prtry: ReferredDocumentType3Choice = Field(alias="CdOrPrtry")
    issr: Max35Text | None = Field(None, alias="Issr")


class ReferredDocumentInformation7(ISOModel):
    tp: ReferredDocumentType4 | None = Field(None, alias="Tp")
    nb: Max35Text | None = Field(None, alias="Nb")
    rltd_dt: ISODate | None = Field(None, alias="RltdDt")
    line_dtls: list[DocumentLineInformation1] | None = Field(None, alias="LineDtls")


class RemittanceAmount2(ISOModel):
    due_pybl_amt: ActiveOrHistoricCurrencyAndAmount | None = Field(None, alias="DuePyblAmt")
    dscnt_apld_amt: list[DiscountAmountAndType1] | None = Field(None, alias="DscntApldAmt")
    cdt_note_amt: ActiveOrHistoricCurrencyAndAmount | None = Field(None, alias="CdtNoteAmt")
    tax_amt: list[TaxAmountAndType1] | None = Field(None, alias="TaxAmt")
    adjstmnt_amt_and_rsn: list[DocumentAdjustment1] | None = Field(None, alias="AdjstmntAmtAndRsn")
    rmtd_amt: ActiveOrHistoricCurrencyAndAmount | None = Field(None, alias="RmtdAmt")


class RemittanceLocationMethod2Code(str, Enum):
    FAXI = "FAXI"
    EDIC = "EDIC"
    URID = "URID"
    EMAL = "EMAL"
    POST = "POST"
    SMSM = "SMSM"


class RemittanceLocationData1(ISOModel):
    mtd: RemittanceLocationMethod2Code = Field(alias="Mtd")
    elctrnc_adr: Max2048Text | None = Field(None, alias="ElctrncAdr")
    pstl_adr: NameAndAddress16 | None = Field(None, alias="PstlAdr")


class RemittanceLocation7(ISOModel):
    rmt_id: Max35Text | None = Field(None, alias="RmtId")
    rmt_lctn_dtls: list[RemittanceLocationData1] | None = Field(None, alias="RmtLctnDtls")


class ReportPeriodActivity1Code(str, Enum):
    NOTX = "NOTX"


RequestedIndicator = bool


class RequestType4Choice(ChoiceModel):
    pmt_ctrl: ExternalPaymentControlRequestType1Code | None = Field(None, alias="PmtCtrl")
    enqry: ExternalEnquiryRequestType1Code | None = Field(None, alias="Enqry")
    prtry: GenericIdentification1 | None = Field(None, alias="Prtry")


class ResidenceType1Code(str, Enum):
    DMST = "DMST"
    FRGN = "FRGN"
    MXED = "MXED"


class Restriction1(ISOModel):
    rstrctn_tp: CodeOrProprietary1Choice = Field(alias="RstrctnTp")
    vld_fr: str = Field(alias="VldFr")
    vld_until: str | None = Field(None, alias="VldUntil")


class SkipPayload(ISOModel):
    """Request without parameters."""


class SpecialPurpose2Code(str, Enum):
    BLNK = "BLNK"
    NTAV = "NTAV"


class TaxParty1(ISOModel):
    tax_id: Max35Text | None = Field(None, alias="TaxId")
    regn_id: Max35Text | None = Field(None, alias="RegnId")
    tax_tp: Max35Text | None = Field(None, alias="TaxTp")


class TaxAuthorisation1(ISOModel):
    titl: Max35Text | None = Field(None, alias="Titl")
    nm: Max140Text | None = Field(None, alias="Nm")


class TaxParty2(ISOModel):
    tax_id: Max35Text | None = Field(None, alias="TaxId")
    regn_id: Max35Text | None = Field(None, alias="RegnId")
    tax_tp: Max35Text | None = Field(None, alias="TaxTp")
    authstn: TaxAuthorisation1 | None = Field(None, alias="Authstn")


class TaxRecordPeriod1Code(str, Enum):
    MM01 = "MM01"
    MM02 = "MM02"
    MM03 = "MM03"
    MM04 = "MM04"
    MM05 = "MM05"
    MM06 = "MM06"
    MM07 = "MM07"
    MM08 = "MM08"
    MM09 = "MM09"
    MM10 = "MM10"
    MM11 = "MM11"
    MM12 = "MM12"
    QTR1 = "QTR1"
    QTR2 = "QTR2"
    QTR3 = "QTR3"
    QTR4 = "QTR4"
    HLF1 = "HLF1"
    HLF2 = "HLF2"


class TaxPeriod2(ISOModel):
    yr: ISOYear | None = Field(None, alias="Yr")
    tp: TaxRecordPeriod1Code | None = Field(None, alias="Tp")
    fr_to_dt: DatePeriod2 | None = Field(None, alias="FrToDt")


class TaxRecordDetails2(ISOModel):
    prd: TaxPeriod2 | None = Field(None, alias="Prd")
    amt: ActiveOrHistoricCurrencyAndAmount = Field(alias="Amt")


class TaxAmount2(ISOModel):
    rate: Decimal | None = Field(None, alias="Rate")
    taxbl_base_amt: ActiveOrHistoricCurrencyAndAmount | None = Field(None, alias="TaxblBaseAmt")
    ttl_amt: ActiveOrHistoricCurrencyAndAmount | None = Field(None, alias="TtlAmt")
    dtls: list[TaxRecordDetails2] | None = Field(None, alias="Dtls")


class TaxRecord2(ISOModel):
    tp: Max35Text | None = Field(None, alias="Tp")
    ctgy: Max35Text | None = Field(None, alias="Ctgy")
    ctgy_dtls: Max35Text | None = Field(None, alias="CtgyDtls")
    dbtr_sts: Max35Text | None = Field(None, alias="DbtrSts")
    cert_id: Max35Text | None = Field(None, alias="CertId")
    frms_cd: Max35Text | None = Field(None, alias="FrmsCd")
    prd: TaxPeriod2 | None = Field(None, alias="Prd")
    tax_amt: TaxAmount2 | None = Field(None, alias="TaxAmt")
    addtl_inf: Max140Text | None = Field(None, alias="AddtlInf")


class TaxInformation7(ISOModel):
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
    rcrd: list[TaxRecord2] | None = Field(None, alias="Rcrd")


class StructuredRemittanceInformation16(ISOModel):
    rfrd_doc_inf: list[ReferredDocumentInformation7] | None = Field(None, alias="RfrdDocInf")
    rfrd_doc_amt: RemittanceAmount2 | None = Field(None, alias="RfrdDocAmt")
    cdtr_ref_inf: CreditorReferenceInformation2 | None = Field(None, alias="CdtrRefInf")
    invcr: PartyIdentification135 | None = Field(None, alias="Invcr")
    invcee: PartyIdentification135 | None = Field(None, alias="Invcee")
    tax_rmt: TaxInformation7 | None = Field(None, alias="TaxRmt")
    grnshmt_rmt: Garnishment3 | None = Field(None, alias="GrnshmtRmt")
    addtl_rmt_inf: list[Max140Text] | None = Field(None, alias="AddtlRmtInf")


class SupplementaryDataEnvelope1(ISOModel):
    """Extension point; any content is accepted and not interpreted."""

    model_config = ConfigDict(extra="allow")


class SupplementaryData1(ISOModel):
    plc_and_nm: Max350Text | None = Field(None, alias="PlcAndNm")
    envlp: SupplementaryDataEnvelope1 = Field(alias="Envlp")


class SystemPartyIdentification8(ISOModel):
    id: PartyIdentification136 = Field(alias="Id")
    rspnsbl_pty_id: PartyIdentification136 | None = Field(None, alias="RspnsblPtyId")


class SystemPartyType1Choice(ChoiceModel):
    cd: ExternalSystemPartyType1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class TaxPeriod3(ISOModel):
    yr: ISOYear | None = Field(None, alias="Yr")
    tp: TaxRecordPeriod1Code | None = Field(None, alias="Tp")
    fr_to_dt: DatePeriod2 | None = Field(None, alias="FrToDt")


class UUIDv4Identifier(SimpleText):
    """Universally unique identifier, version 4 (RFC 4122)."""

    pattern = r"[a-f0-9]{8}-[a-f0-9]{4}-4[a-f0-9]{3}-[89ab][a-f0-9]{3}-[a-f0-9]{12}"


class TransactionReferences6(ISOModel):
    msg_id: Max35Text | None = Field(None, alias="MsgId")
    acct_svcr_ref: Max35Text | None = Field(None, alias="AcctSvcrRef")
    pmt_inf_id: Max35Text | None = Field(None, alias="PmtInfId")
    instr_id: Max35Text | None = Field(None, alias="InstrId")
    end_to_end_id: Max35Text | None = Field(None, alias="EndToEndId")
    uetr: UUIDv4Identifier | None = Field(None, alias="UETR")
    tx_id: Max35Text | None = Field(None, alias="TxId")
    mndt_id: Max35Text | None = Field(None, alias="MndtId")
    chq_nb: Max35Text | None = Field(None, alias="ChqNb")
    clr_sys_ref: Max35Text | None = Field(None, alias="ClrSysRef")
    acct_ownr_tx_id: Max35Text | None = Field(None, alias="AcctOwnrTxId")
    acct_svcr_tx_id: Max35Text | None = Field(None, alias="AcctSvcrTxId")
    mkt_infrstrctr_tx_id: Max35Text | None = Field(None, alias="MktInfrstrctrTxId")
    prcg_id: Max35Text | None = Field(None, alias="PrcgId")
    prtry: list[ProprietaryReference1] | None = Field(None, alias="Prtry")


TrueFalseIndicator = bool


YesNoIndicator = bool
