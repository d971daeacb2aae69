"""
auth.090.001.02 - DerivativesTradePositionSetReportV02

Derivatives trade position set report, sent by a trade repository to an authority with aggregated
position sets of reported derivatives.

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
    ActiveCurrencyCode,
    ActiveOrHistoricCurrencyAnd20DecimalAmount,
    ActiveOrHistoricCurrencyCode,
    CountryCode,
    ExternalAgreementType1Code,
    GenericIdentification175,
    ISINOct2015Identifier,
    ISODate,
    ISODateTime,
    LEIIdentifier,
    MaturityTerm2,
    Max1000Text,
    Max105Text,
    Max210Text,
    Max350Text,
    Max35Text,
    Max4AlphaNumericText,
    Max4Text,
    Max500Text,
    Max52Text,
    NoReasonCode,
    OrganisationIdentification15Choice,
    ReportPeriodActivity1Code,
    SpecialPurpose2Code,
    SupplementaryData1,
)


class ActiveOrHistoricCurrencyAnd19DecimalAmountSimpleType(SimpleDecimal):
    min_inclusive = Decimal("0")


class ActiveOrHistoricCurrencyAnd19DecimalAmount(ISOModel):
    ccy: ActiveOrHistoricCurrencyCode = attribute("Ccy")
    value: ActiveOrHistoricCurrencyAnd19DecimalAmountSimpleType = content()


class Max50Text(SimpleText):
    min_length = 1
    max_length = 50


class AgreementType2Choice(ChoiceModel):
    tp: ExternalAgreementType1Code | None = Field(None, alias="Tp")
    prtry: Max50Text | None = Field(None, alias="Prtry")


class AssetClassProductType1Code(str, Enum):
    AGRI = "AGRI"


class AssetClassSubProductType20Code(str, Enum):
    DIRY = "DIRY"


class AgriculturalCommodityDairy2(ISOModel):
    base_pdct: AssetClassProductType1Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType20Code | None = Field(None, alias="SubPdct")


class AssetClassSubProductType21Code(str, Enum):
    FRST = "FRST"


class AgriculturalCommodityForestry2(ISOModel):
    base_pdct: AssetClassProductType1Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType21Code | None = Field(None, alias="SubPdct")


class AssetClassDetailedSubProductType30Code(str, Enum):
    MWHT = "MWHT"
    OTHR = "OTHR"


class AssetClassSubProductType5Code(str, Enum):
    GRIN = "GRIN"


class AgriculturalCommodityGrain3(ISOModel):
    base_pdct: AssetClassProductType1Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType5Code | None = Field(None, alias="SubPdct")
    addtl_sub_pdct: AssetClassDetailedSubProductType30Code | None = Field(
        None, alias="AddtlSubPdct"
    )


class AssetClassSubProductType22Code(str, Enum):
    LSTK = "LSTK"


class AgriculturalCommodityLiveStock2(ISOModel):
    base_pdct: AssetClassProductType1Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType22Code | None = Field(None, alias="SubPdct")


class AssetClassDetailedSubProductType1Code(str, Enum):
    FWHT = "FWHT"
    SOYB = "SOYB"
    RPSD = "RPSD"
    OTHR = "OTHR"
    CORN = "CORN"
    RICE = "RICE"


class AssetClassSubProductType1Code(str, Enum):
    GROS = "GROS"


class AgriculturalCommodityOilSeed2(ISOModel):
    base_pdct: AssetClassProductType1Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType1Code | None = Field(None, alias="SubPdct")
    addtl_sub_pdct: AssetClassDetailedSubProductType1Code | None = Field(
        None, alias="AddtlSubPdct"
    )


class AssetClassDetailedSubProductType29Code(str, Enum):
    LAMP = "LAMP"
    OTHR = "OTHR"


class AssetClassSubProductType3Code(str, Enum):
    OOLI = "OOLI"


class AgriculturalCommodityOliveOil3(ISOModel):
    base_pdct: AssetClassProductType1Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType3Code | None = Field(None, alias="SubPdct")
    addtl_sub_pdct: AssetClassDetailedSubProductType29Code | None = Field(
        None, alias="AddtlSubPdct"
    )


class AssetClassSubProductType49Code(str, Enum):
    OTHR = "OTHR"


class AgriculturalCommodityOther2(ISOModel):
    base_pdct: AssetClassProductType1Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType49Code | None = Field(None, alias="SubPdct")


class AssetClassSubProductType45Code(str, Enum):
    POTA = "POTA"


class AgriculturalCommodityPotato2(ISOModel):
    base_pdct: AssetClassProductType1Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType45Code | None = Field(None, alias="SubPdct")


class AssetClassSubProductType23Code(str, Enum):
    SEAF = "SEAF"


class AgriculturalCommoditySeafood2(ISOModel):
    base_pdct: AssetClassProductType1Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType23Code | None = Field(None, alias="SubPdct")


class AssetClassDetailedSubProductType2Code(str, Enum):
    ROBU = "ROBU"
    CCOA = "CCOA"
    BRWN = "BRWN"
    WHSG = "WHSG"
    OTHR = "OTHR"


class AssetClassSubProductType2Code(str, Enum):
    SOFT = "SOFT"


class AgriculturalCommoditySoft2(ISOModel):
    base_pdct: AssetClassProductType1Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType2Code | None = Field(None, alias="SubPdct")
    addtl_sub_pdct: AssetClassDetailedSubProductType2Code | None = Field(
        None, alias="AddtlSubPdct"
    )


class AssetClassCommodityAgricultural6Choice(ChoiceModel):
    grn_oil_seed: AgriculturalCommodityOilSeed2 | None = Field(None, alias="GrnOilSeed")
    soft: AgriculturalCommoditySoft2 | None = Field(None, alias="Soft")
    ptt: AgriculturalCommodityPotato2 | None = Field(None, alias="Ptt")
    olv_oil: AgriculturalCommodityOliveOil3 | None = Field(None, alias="OlvOil")
    dairy: AgriculturalCommodityDairy2 | None = Field(None, alias="Dairy")
    frstry: AgriculturalCommodityForestry2 | None = Field(None, alias="Frstry")
    sfd: AgriculturalCommoditySeafood2 | None = Field(None, alias="Sfd")
    live_stock: AgriculturalCommodityLiveStock2 | None = Field(None, alias="LiveStock")
    grn: AgriculturalCommodityGrain3 | None = Field(None, alias="Grn")
    othr: AgriculturalCommodityOther2 | None = Field(None, alias="Othr")


class AssetClassProductType11Code(str, Enum):
    OTHC = "OTHC"


class AssetClassCommodityC10Other1(ISOModel):
    base_pdct: AssetClassProductType11Code = Field(alias="BasePdct")


class AssetClassProductType2Code(str, Enum):
    NRGY = "NRGY"


class AssetClassSubProductType24Code(str, Enum):
    COAL = "COAL"


class EnergyCommodityCoal2(ISOModel):
    base_pdct: AssetClassProductType2Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType24Code | None = Field(None, alias="SubPdct")


class AssetClassSubProductType25Code(str, Enum):
    DIST = "DIST"


class EnergyCommodityDistillates2(ISOModel):
    base_pdct: AssetClassProductType2Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType25Code | None = Field(None, alias="SubPdct")


class AssetClassDetailedSubProductType5Code(str, Enum):
    BSLD = "BSLD"
    FITR = "FITR"
    PKLD = "PKLD"
    OFFP = "OFFP"
    OTHR = "OTHR"


class AssetClassSubProductType6Code(str, Enum):
    ELEC = "ELEC"


class EnergyCommodityElectricity2(ISOModel):
    base_pdct: AssetClassProductType2Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType6Code | None = Field(None, alias="SubPdct")
    addtl_sub_pdct: AssetClassDetailedSubProductType5Code | None = Field(
        None, alias="AddtlSubPdct"
    )


class AssetClassSubProductType26Code(str, Enum):
    INRG = "INRG"


class EnergyCommodityInterEnergy2(ISOModel):
    base_pdct: AssetClassProductType2Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType26Code | None = Field(None, alias="SubPdct")


class AssetClassSubProductType27Code(str, Enum):
    LGHT = "LGHT"


class EnergyCommodityLightEnd2(ISOModel):
    base_pdct: AssetClassProductType2Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType27Code | None = Field(None, alias="SubPdct")


class AssetClassDetailedSubProductType31Code(str, Enum):
    GASP = "GASP"
    LNGG = "LNGG"
    NCGG = "NCGG"
    TTFG = "TTFG"
    NBPG = "NBPG"
    OTHR = "OTHR"


class AssetClassSubProductType7Code(str, Enum):
    NGAS = "NGAS"


class EnergyCommodityNaturalGas3(ISOModel):
    base_pdct: AssetClassProductType2Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType7Code | None = Field(None, alias="SubPdct")
    addtl_sub_pdct: AssetClassDetailedSubProductType31Code | None = Field(
        None, alias="AddtlSubPdct"
    )


class AssetClassDetailedSubProductType32Code(str, Enum):
    BAKK = "BAKK"
    BDSL = "BDSL"
    BRNT = "BRNT"
    BRNX = "BRNX"
    CNDA = "CNDA"
    COND = "COND"
    DSEL = "DSEL"
    DUBA = "DUBA"
    ESPO = "ESPO"
    ETHA = "ETHA"
    FUEL = "FUEL"
    FOIL = "FOIL"
    GOIL = "GOIL"
    GSLN = "GSLN"
    HEAT = "HEAT"
    JTFL = "JTFL"
    KERO = "KERO"
    LLSO = "LLSO"
    MARS = "MARS"
    NAPH = "NAPH"
    NGLO = "NGLO"
    TAPI = "TAPI"
    WTIO = "WTIO"
    URAL = "URAL"
    OTHR = "OTHR"


class AssetClassSubProductType8Code(str, Enum):
    OILP = "OILP"


class EnergyCommodityOil3(ISOModel):
    base_pdct: AssetClassProductType2Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType8Code | None = Field(None, alias="SubPdct")
    addtl_sub_pdct: AssetClassDetailedSubProductType32Code | None = Field(
        None, alias="AddtlSubPdct"
    )


class EnergyCommodityOther2(ISOModel):
    base_pdct: AssetClassProductType2Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType49Code | None = Field(None, alias="SubPdct")


class AssetClassSubProductType28Code(str, Enum):
    RNNG = "RNNG"


class EnergyCommodityRenewableEnergy2(ISOModel):
    base_pdct: AssetClassProductType2Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType28Code | None = Field(None, alias="SubPdct")


class AssetClassCommodityEnergy3Choice(ChoiceModel):
    elctrcty: EnergyCommodityElectricity2 | None = Field(None, alias="Elctrcty")
    ntrl_gas: EnergyCommodityNaturalGas3 | None = Field(None, alias="NtrlGas")
    oil: EnergyCommodityOil3 | None = Field(None, alias="Oil")
    coal: EnergyCommodityCoal2 | None = Field(None, alias="Coal")
    intr_nrgy: EnergyCommodityInterEnergy2 | None = Field(None, alias="IntrNrgy")
    rnwbl_nrgy: EnergyCommodityRenewableEnergy2 | None = Field(None, alias="RnwblNrgy")
    lght_end: EnergyCommodityLightEnd2 | None = Field(None, alias="LghtEnd")
    dstllts: EnergyCommodityDistillates2 | None = Field(None, alias="Dstllts")
    othr: EnergyCommodityOther2 | None = Field(None, alias="Othr")


class AssetClassProductType3Code(str, Enum):
    ENVR = "ENVR"


class AssetClassSubProductType29Code(str, Enum):
    CRBR = "CRBR"


class EnvironmentalCommodityCarbonRelated2(ISOModel):
    base_pdct: AssetClassProductType3Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType29Code | None = Field(None, alias="SubPdct")


class AssetClassDetailedSubProductType8Code(str, Enum):
    CERE = "CERE"
    ERUE = "ERUE"
    EUAE = "EUAE"
    EUAA = "EUAA"
    OTHR = "OTHR"


class AssetClassSubProductType10Code(str, Enum):
    EMIS = "EMIS"


class EnvironmentalCommodityEmission3(ISOModel):
    base_pdct: AssetClassProductType3Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType10Code | None = Field(None, alias="SubPdct")
    addtl_sub_pdct: AssetClassDetailedSubProductType8Code | None = Field(
        None, alias="AddtlSubPdct"
    )


class AssetClassSubProductType30Code(str, Enum):
    WTHR = "WTHR"


class EnvironmentalCommodityWeather2(ISOModel):
    base_pdct: AssetClassProductType3Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType30Code | None = Field(None, alias="SubPdct")


class EnvironmentCommodityOther2(ISOModel):
    base_pdct: AssetClassProductType3Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType49Code | None = Field(None, alias="SubPdct")


class AssetClassCommodityEnvironmental3Choice(ChoiceModel):
    emssns: EnvironmentalCommodityEmission3 | None = Field(None, alias="Emssns")
    wthr: EnvironmentalCommodityWeather2 | None = Field(None, alias="Wthr")
    crbn_rltd: EnvironmentalCommodityCarbonRelated2 | None = Field(None, alias="CrbnRltd")
    othr: EnvironmentCommodityOther2 | None = Field(None, alias="Othr")


class AssetClassProductType5Code(str, Enum):
    FRTL = "FRTL"


class AssetClassSubProductType39Code(str, Enum):
    AMMO = "AMMO"


class FertilizerCommodityAmmonia2(ISOModel):
    base_pdct: AssetClassProductType5Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType39Code | None = Field(None, alias="SubPdct")


class AssetClassSubProductType40Code(str, Enum):
    DAPH = "DAPH"


class FertilizerCommodityDiammoniumPhosphate2(ISOModel):
    base_pdct: AssetClassProductType5Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType40Code | None = Field(None, alias="SubPdct")


class FertilizerCommodityOther2(ISOModel):
    base_pdct: AssetClassProductType5Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType49Code | None = Field(None, alias="SubPdct")


class AssetClassSubProductType41Code(str, Enum):
    PTSH = "PTSH"


class FertilizerCommodityPotash2(ISOModel):
    base_pdct: AssetClassProductType5Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType41Code | None = Field(None, alias="SubPdct")


class AssetClassSubProductType42Code(str, Enum):
    SLPH = "SLPH"


class FertilizerCommoditySulphur2(ISOModel):
    base_pdct: AssetClassProductType5Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType42Code | None = Field(None, alias="SubPdct")


class AssetClassSubProductType43Code(str, Enum):
    UREA = "UREA"


class FertilizerCommodityUrea2(ISOModel):
    base_pdct: AssetClassProductType5Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType43Code | None = Field(None, alias="SubPdct")


class AssetClassSubProductType44Code(str, Enum):
    UAAN = "UAAN"


class FertilizerCommodityUreaAndAmmoniumNitrate2(ISOModel):
    base_pdct: AssetClassProductType5Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType44Code | None = Field(None, alias="SubPdct")


class AssetClassCommodityFertilizer4Choice(ChoiceModel):
    ammn: FertilizerCommodityAmmonia2 | None = Field(None, alias="Ammn")
    dmmnm_phspht: FertilizerCommodityDiammoniumPhosphate2 | None = Field(None, alias="DmmnmPhspht")
    ptsh: FertilizerCommodityPotash2 | None = Field(None, alias="Ptsh")
    slphr: FertilizerCommoditySulphur2 | None = Field(None, alias="Slphr")
    urea: FertilizerCommodityUrea2 | None = Field(None, alias="Urea")
    urea_and_ammnm_ntrt: FertilizerCommodityUreaAndAmmoniumNitrate2 | None = Field(
        None, alias="UreaAndAmmnmNtrt"
    )
    othr: FertilizerCommodityOther2 | None = Field(None, alias="Othr")


class AssetClassProductType4Code(str, Enum):
    FRGT = "FRGT"


class AssetClassSubProductType46Code(str, Enum):
    CSHP = "CSHP"


class FreightCommodityContainerShip2(ISOModel):
    base_pdct: AssetClassProductType4Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType46Code | None = Field(None, alias="SubPdct")


class AssetClassDetailedSubProductType33Code(str, Enum):
    DBCR = "DBCR"
    OTHR = "OTHR"


class AssetClassSubProductType31Code(str, Enum):
    DRYF = "DRYF"


class FreightCommodityDry3(ISOModel):
    base_pdct: AssetClassProductType4Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType31Code | None = Field(None, alias="SubPdct")
    addtl_sub_pdct: AssetClassDetailedSubProductType33Code | None = Field(
        None, alias="AddtlSubPdct"
    )


class FreightCommodityOther2(ISOModel):
    base_pdct: AssetClassProductType4Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType49Code | None = Field(None, alias="SubPdct")


class AssetClassDetailedSubProductType34Code(str, Enum):
    TNKR = "TNKR"
    OTHR = "OTHR"


class AssetClassSubProductType32Code(str, Enum):
    WETF = "WETF"


class FreightCommodityWet3(ISOModel):
    base_pdct: AssetClassProductType4Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType32Code | None = Field(None, alias="SubPdct")
    addtl_sub_pdct: AssetClassDetailedSubProductType34Code | None = Field(
        None, alias="AddtlSubPdct"
    )


class AssetClassCommodityFreight4Choice(ChoiceModel):
    dry: FreightCommodityDry3 | None = Field(None, alias="Dry")
    wet: FreightCommodityWet3 | None = Field(None, alias="Wet")
    cntnr_ship: FreightCommodityContainerShip2 | None = Field(None, alias="CntnrShip")
    othr: FreightCommodityOther2 | None = Field(None, alias="Othr")


class AssetClassProductType16Code(str, Enum):
    INDX = "INDX"


class AssetClassCommodityIndex1(ISOModel):
    base_pdct: AssetClassProductType16Code = Field(alias="BasePdct")


class AssetClassProductType6Code(str, Enum):
    INDP = "INDP"


class AssetClassSubProductType33Code(str, Enum):
    CSTR = "CSTR"


class IndustrialProductCommodityConstruction2(ISOModel):
    base_pdct: AssetClassProductType6Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType33Code | None = Field(None, alias="SubPdct")


class AssetClassSubProductType34Code(str, Enum):
    MFTG = "MFTG"


class IndustrialProductCommodityManufacturing2(ISOModel):
    base_pdct: AssetClassProductType6Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType34Code | None = Field(None, alias="SubPdct")


class AssetClassCommodityIndustrialProduct2Choice(ChoiceModel):
    cnstrctn: IndustrialProductCommodityConstruction2 | None = Field(None, alias="Cnstrctn")
    manfctg: IndustrialProductCommodityManufacturing2 | None = Field(None, alias="Manfctg")


class AssetClassProductType12Code(str, Enum):
    INFL = "INFL"


class AssetClassCommodityInflation1(ISOModel):
    base_pdct: AssetClassProductType12Code = Field(alias="BasePdct")


class AssetClassDetailedSubProductType10Code(str, Enum):
    ALUM = "ALUM"
    ALUA = "ALUA"
    CBLT = "CBLT"
    COPR = "COPR"
    IRON = "IRON"
    MOLY = "MOLY"
    NASC = "NASC"
    NICK = "NICK"
    STEL = "STEL"
    TINN = "TINN"
    ZINC = "ZINC"
    OTHR = "OTHR"
    LEAD = "LEAD"


class AssetClassProductType7Code(str, Enum):
    METL = "METL"


class AssetClassSubProductType15Code(str, Enum):
    NPRM = "NPRM"


class MetalCommodityNonPrecious2(ISOModel):
    base_pdct: AssetClassProductType7Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType15Code | None = Field(None, alias="SubPdct")
    addtl_sub_pdct: AssetClassDetailedSubProductType10Code | None = Field(
        None, alias="AddtlSubPdct"
    )


class AssetClassDetailedSubProductType11Code(str, Enum):
    GOLD = "GOLD"
    OTHR = "OTHR"
    PLDM = "PLDM"
    PTNM = "PTNM"
    SLVR = "SLVR"


class AssetClassSubProductType16Code(str, Enum):
    PRME = "PRME"


class MetalCommodityPrecious2(ISOModel):
    base_pdct: AssetClassProductType7Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType16Code | None = Field(None, alias="SubPdct")
    addtl_sub_pdct: AssetClassDetailedSubProductType11Code | None = Field(
        None, alias="AddtlSubPdct"
    )


class AssetClassCommodityMetal2Choice(ChoiceModel):
    non_prcs: MetalCommodityNonPrecious2 | None = Field(None, alias="NonPrcs")
    prcs: MetalCommodityPrecious2 | None = Field(None, alias="Prcs")


class AssetClassProductType13Code(str, Enum):
    MCEX = "MCEX"


class AssetClassCommodityMultiCommodityExotic1(ISOModel):
    base_pdct: AssetClassProductType13Code = Field(alias="BasePdct")


class AssetClassProductType14Code(str, Enum):
    OEST = "OEST"


class AssetClassCommodityOfficialEconomicStatistics1(ISOModel):
    base_pdct: AssetClassProductType14Code = Field(alias="BasePdct")


class AssetClassProductType15Code(str, Enum):
    OTHR = "OTHR"


class AssetClassCommodityOther1(ISOModel):
    base_pdct: AssetClassProductType15Code = Field(alias="BasePdct")


class AssetClassProductType8Code(str, Enum):
    PAPR = "PAPR"


class AssetClassSubProductType35Code(str, Enum):
    CBRD = "CBRD"


class PaperCommodityContainerBoard2(ISOModel):
    base_pdct: AssetClassProductType8Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType35Code | None = Field(None, alias="SubPdct")


class AssetClassSubProductType36Code(str, Enum):
    NSPT = "NSPT"


class PaperCommodityNewsprint2(ISOModel):
    base_pdct: AssetClassProductType8Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType36Code | None = Field(None, alias="SubPdct")


class PaperCommodityOther1(ISOModel):
    base_pdct: AssetClassProductType8Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType49Code | None = Field(None, alias="SubPdct")


class AssetClassSubProductType37Code(str, Enum):
    PULP = "PULP"


class PaperCommodityPulp2(ISOModel):
    base_pdct: AssetClassProductType8Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType37Code | None = Field(None, alias="SubPdct")


class AssetClassCommodityPaper4Choice(ChoiceModel):
    cntnr_brd: PaperCommodityContainerBoard2 | None = Field(None, alias="CntnrBrd")
    nwsprnt: PaperCommodityNewsprint2 | None = Field(None, alias="Nwsprnt")
    pulp: PaperCommodityPulp2 | None = Field(None, alias="Pulp")
    rcvrd_ppr: PaperCommodityOther1 | None = Field(None, alias="RcvrdPpr")
    othr: PaperCommodityOther1 | None = Field(None, alias="Othr")


class AssetClassProductType9Code(str, Enum):
    POLY = "POLY"


class PolypropyleneCommodityOther2(ISOModel):
    base_pdct: AssetClassProductType9Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType49Code | None = Field(None, alias="SubPdct")


class AssetClassSubProductType18Code(str, Enum):
    PLST = "PLST"


class PolypropyleneCommodityPlastic2(ISOModel):
    base_pdct: AssetClassProductType9Code = Field(alias="BasePdct")
    sub_pdct: AssetClassSubProductType18Code | None = Field(None, alias="SubPdct")


class AssetClassCommodityPolypropylene4Choice(ChoiceModel):
    plstc: PolypropyleneCommodityPlastic2 | None = Field(None, alias="Plstc")
    othr: PolypropyleneCommodityOther2 | None = Field(None, alias="Othr")


class AssetClassCommodity6Choice(ChoiceModel):
    agrcltrl: AssetClassCommodityAgricultural6Choice | None = Field(None, alias="Agrcltrl")
    nrgy: AssetClassCommodityEnergy3Choice | None = Field(None, alias="Nrgy")
    envttl: AssetClassCommodityEnvironmental3Choice | None = Field(None, alias="Envttl")
    frtlzr: AssetClassCommodityFertilizer4Choice | None = Field(None, alias="Frtlzr")
    frght: AssetClassCommodityFreight4Choice | None = Field(None, alias="Frght")
    indx: AssetClassCommodityIndex1 | None = Field(None, alias="Indx")
    indstrl_pdct: AssetClassCommodityIndustrialProduct2Choice | None = Field(
        None, alias="IndstrlPdct"
    )
    infltn: AssetClassCommodityInflation1 | None = Field(None, alias="Infltn")
    metl: AssetClassCommodityMetal2Choice | None = Field(None, alias="Metl")
    multi_cmmdty_extc: AssetClassCommodityMultiCommodityExotic1 | None = Field(
        None, alias="MultiCmmdtyExtc"
    )
    offcl_ecnmc_sttstcs: AssetClassCommodityOfficialEconomicStatistics1 | None = Field(
        None, alias="OffclEcnmcSttstcs"
    )
    othr: AssetClassCommodityOther1 | None = Field(None, alias="Othr")
    othr_c10: AssetClassCommodityC10Other1 | None = Field(None, alias="OthrC10")
    ppr: AssetClassCommodityPaper4Choice | None = Field(None, alias="Ppr")
    plprpln: AssetClassCommodityPolypropylene4Choice | None = Field(None, alias="Plprpln")


class Max100Text(SimpleText):
    min_length = 1
    max_length = 100


class GenericIdentification184(ISOModel):
    id: Max210Text = Field(alias="Id")
    src: Max100Text = Field(alias="Src")


class UniqueProductIdentifier1Choice(ChoiceModel):
    id: Max52Text | None = Field(None, alias="Id")
    prtry: GenericIdentification175 | None = Field(None, alias="Prtry")


class InstrumentIdentification6Choice(ChoiceModel):
    isin: ISINOct2015Identifier | None = Field(None, alias="ISIN")
    altrntv_instrm_id: Max52Text | None = Field(None, alias="AltrntvInstrmId")
    unq_pdct_idr: UniqueProductIdentifier1Choice | None = Field(None, alias="UnqPdctIdr")
    othr_id: GenericIdentification184 | None = Field(None, alias="OthrId")


class ExternalUnitOfMeasure1Code(SimpleText):
    min_length = 1
    max_length = 4


class UnitOfMeasure8Choice(ChoiceModel):
    cd: ExternalUnitOfMeasure1Code | None = Field(None, alias="Cd")
    prtry: GenericIdentification175 | None = Field(None, alias="Prtry")


class BasketConstituents3(ISOModel):
    instrm_id: InstrumentIdentification6Choice = Field(alias="InstrmId")
    qty: Decimal | None = Field(None, alias="Qty")
    unit_of_measr: UnitOfMeasure8Choice | None = Field(None, alias="UnitOfMeasr")


class CollateralisationType3Code(str, Enum):
    FLCL = "FLCL"
    OWCL = "OWCL"
    OWC1 = "OWC1"
    OWC2 = "OWC2"
    OWP1 = "OWP1"
    OWP2 = "OWP2"
    PRCL = "PRCL"
    PRC1 = "PRC1"
    PRC2 = "PRC2"
    UNCL = "UNCL"


class NotApplicable1Code(str, Enum):
    NOAP = "NOAP"


class PortfolioIdentification3(ISOModel):
    cd: Max52Text = Field(alias="Cd")
    prtfl_tx_xmptn: bool | None = Field(None, alias="PrtflTxXmptn")


class PortfolioCode5Choice(ChoiceModel):
    prtfl: PortfolioIdentification3 | None = Field(None, alias="Prtfl")
    no_prtfl: NotApplicable1Code | None = Field(None, alias="NoPrtfl")


class MarginPortfolio3(ISOModel):
    initl_mrgn_prtfl_cd: PortfolioCode5Choice = Field(alias="InitlMrgnPrtflCd")
    vartn_mrgn_prtfl_cd: PortfolioCode5Choice | None = Field(None, alias="VartnMrgnPrtflCd")


class PortfolioCode3Choice(ChoiceModel):
    cd: Max52Text | None = Field(None, alias="Cd")
    no_prtfl: NotApplicable1Code | None = Field(None, alias="NoPrtfl")


class CollateralPortfolioCode5Choice(ChoiceModel):
    prtfl: PortfolioCode3Choice | None = Field(None, alias="Prtfl")
    mrgn_prtfl_cd: MarginPortfolio3 | None = Field(None, alias="MrgnPrtflCd")


class FinancialPartySectorType3Code(str, Enum):
    AIFD = "AIFD"
    CSDS = "CSDS"
    CCPS = "CCPS"
    CDTI = "CDTI"
    INUN = "INUN"
    ORPI = "ORPI"
    INVF = "INVF"
    REIN = "REIN"
    UCIT = "UCIT"
    ASSU = "ASSU"
    OTHR = "OTHR"


class FinancialPartyClassification2Choice(ChoiceModel):
    cd: FinancialPartySectorType3Code | None = Field(None, alias="Cd")
    prtry: GenericIdentification175 | None = Field(None, alias="Prtry")


class FinancialInstitutionSector1(ISOModel):
    sctr: list[FinancialPartyClassification2Choice] = Field(alias="Sctr")
    clr_thrshld: bool | None = Field(None, alias="ClrThrshld")


class NonFinancialInstitutionSector10(ISOModel):
    sctr: list[GenericIdentification175] = Field(alias="Sctr")
    clr_thrshld: bool | None = Field(None, alias="ClrThrshld")
    drctly_lkd_actvty: bool | None = Field(None, alias="DrctlyLkdActvty")
    fdrl_instn: bool | None = Field(None, alias="FdrlInstn")


class CounterpartyTradeNature15Choice(ChoiceModel):
    fi: FinancialInstitutionSector1 | None = Field(None, alias="FI")
    nfi: NonFinancialInstitutionSector10 | None = Field(None, alias="NFI")
    cntrl_cntr_pty: NoReasonCode | None = Field(None, alias="CntrlCntrPty")
    othr: NoReasonCode | None = Field(None, alias="Othr")


class OptionParty3Code(str, Enum):
    MAKE = "MAKE"
    TAKE = "TAKE"


class Direction2(ISOModel):
    drctn_of_the_frst_leg: OptionParty3Code = Field(alias="DrctnOfTheFrstLeg")
    drctn_of_the_scnd_leg: OptionParty3Code | None = Field(None, alias="DrctnOfTheScndLeg")


class OptionParty1Code(str, Enum):
    SLLR = "SLLR"
    BYER = "BYER"


class Direction4Choice(ChoiceModel):
    drctn: Direction2 | None = Field(None, alias="Drctn")
    ctr_pty_sd: OptionParty1Code | None = Field(None, alias="CtrPtySd")


class LegalPersonIdentification1(ISOModel):
    id: OrganisationIdentification15Choice = Field(alias="Id")
    ctry: CountryCode | None = Field(None, alias="Ctry")


class NaturalPersonIdentification2(ISOModel):
    id: GenericIdentification175 = Field(alias="Id")
    nm: Max105Text | None = Field(None, alias="Nm")
    dmcl: Max500Text | None = Field(None, alias="Dmcl")


class NaturalPersonIdentification3(ISOModel):
    id: NaturalPersonIdentification2 = Field(alias="Id")
    ctry: CountryCode | None = Field(None, alias="Ctry")


class PartyIdentification248Choice(ChoiceModel):
    lgl: LegalPersonIdentification1 | None = Field(None, alias="Lgl")
    ntrl: NaturalPersonIdentification3 | None = Field(None, alias="Ntrl")


class ReportingExemption1(ISOModel):
    rsn: Max4Text = Field(alias="Rsn")
    desc: Max1000Text | None = Field(None, alias="Desc")


class TradingCapacity7Code(str, Enum):
    AGEN = "AGEN"
    PRIN = "PRIN"


class Counterparty45(ISOModel):
    id: PartyIdentification248Choice = Field(alias="Id")
    ntr: CounterpartyTradeNature15Choice | None = Field(None, alias="Ntr")
    tradg_cpcty: TradingCapacity7Code | None = Field(None, alias="TradgCpcty")
    drctn_or_sd: Direction4Choice | None = Field(None, alias="DrctnOrSd")
    tradr_lctn: CountryCode | None = Field(None, alias="TradrLctn")
    bookg_lctn: CountryCode | None = Field(None, alias="BookgLctn")
    rptg_xmptn: ReportingExemption1 | None = Field(None, alias="RptgXmptn")


class Counterparty46(ISOModel):
    id_tp: PartyIdentification248Choice | None = Field(None, alias="IdTp")
    ntr: CounterpartyTradeNature15Choice | None = Field(None, alias="Ntr")
    rptg_oblgtn: bool | None = Field(None, alias="RptgOblgtn")


class CountrySubDivisionCode(SimpleText):
    pattern = r"[A-Z]{2,2}\-[0-9A-Z]{1,3}"


class DebtInstrumentSeniorityType2Code(str, Enum):
    SBOD = "SBOD"
    SNDB = "SNDB"
    OTHR = "OTHR"


class DerivativePartyIdentification1Choice(ChoiceModel):
    ctry: CountryCode | None = Field(None, alias="Ctry")
    ctry_sub_dvsn: CountrySubDivisionCode | None = Field(None, alias="CtrySubDvsn")
    lei: LEIIdentifier | None = Field(None, alias="LEI")


class Frequency13Code(str, Enum):
    DAIL = "DAIL"
    WEEK = "WEEK"
    MNTH = "MNTH"
    YEAR = "YEAR"
    ADHO = "ADHO"
    EXPI = "EXPI"
    MIAN = "MIAN"
    QURT = "QURT"


class CreditDerivative7(ISOModel):
    snrty: DebtInstrumentSeniorityType2Code | None = Field(None, alias="Snrty")
    ref_pty: DerivativePartyIdentification1Choice | None = Field(None, alias="RefPty")
    pmt_frqcy: Frequency13Code | None = Field(None, alias="PmtFrqcy")
    clctn_bsis: Max35Text | None = Field(None, alias="ClctnBsis")
    srs: Decimal | None = Field(None, alias="Srs")
    vrsn: Decimal | None = Field(None, alias="Vrsn")
    indx_fctr: Decimal | None = Field(None, alias="IndxFctr")
    trch_ind: bool | None = Field(None, alias="TrchInd")


class CustomBasket4(ISOModel):
    strr: LEIIdentifier | None = Field(None, alias="Strr")
    id: Max52Text | None = Field(None, alias="Id")
    cnsttnts: list[BasketConstituents3] | None = Field(None, alias="Cnsttnts")


class ExchangeRateBasis1(ISOModel):
    base_ccy: ActiveCurrencyCode = Field(alias="BaseCcy")
    qtd_ccy: ActiveCurrencyCode = Field(alias="QtdCcy")


class ExchangeRateBasis1Choice(ChoiceModel):
    ccy_pair: ExchangeRateBasis1 | None = Field(None, alias="CcyPair")
    prtry: Max52Text | None = Field(None, alias="Prtry")


class FinancialInstrumentContractType2Code(str, Enum):
    CFDS = "CFDS"
    FRAS = "FRAS"
    FUTR = "FUTR"
    FORW = "FORW"
    OPTN = "OPTN"
    SPDB = "SPDB"
    SWAP = "SWAP"
    SWPT = "SWPT"
    OTHR = "OTHR"


class MarginCollateralReport4(ISOModel):
    coll_prtfl_cd: CollateralPortfolioCode5Choice = Field(alias="CollPrtflCd")
    collstn_ctgy: CollateralisationType3Code = Field(alias="CollstnCtgy")
    tm_stmp: ISODateTime | None = Field(None, alias="TmStmp")


class MasterAgreement8(ISOModel):
    tp: AgreementType2Choice | None = Field(None, alias="Tp")
    vrsn: Max50Text | None = Field(None, alias="Vrsn")
    othr_mstr_agrmt_dtls: Max350Text | None = Field(None, alias="OthrMstrAgrmtDtls")


class OptionType2Code(str, Enum):
    CALL = "CALL"
    PUTO = "PUTO"
    OTHR = "OTHR"


class PartyIdentification236Choice(ChoiceModel):
    lgl: OrganisationIdentification15Choice | None = Field(None, alias="Lgl")
    ntrl: NaturalPersonIdentification2 | None = Field(None, alias="Ntrl")


class PaymentType4Code(str, Enum):
    UFRO = "UFRO"
    UWIN = "UWIN"
    PEXH = "PEXH"


class PaymentType5Choice(ChoiceModel):
    tp: PaymentType4Code | None = Field(None, alias="Tp")
    prtry_tp: Max4AlphaNumericText | None = Field(None, alias="PrtryTp")


class OtherPayment6(ISOModel):
    pmt_ccy: ActiveOrHistoricCurrencyCode | None = Field(None, alias="PmtCcy")
    pmt_tp: PaymentType5Choice | None = Field(None, alias="PmtTp")
    pmt_dt: ISODate | None = Field(None, alias="PmtDt")
    pmt_pyer: PartyIdentification236Choice | None = Field(None, alias="PmtPyer")
    pmt_rcvr: PartyIdentification236Choice | None = Field(None, alias="PmtRcvr")


class ProductType4Code(str, Enum):
    CRDT = "CRDT"
    CURR = "CURR"
    EQUI = "EQUI"
    INTR = "INTR"
    COMM = "COMM"
    OTHR = "OTHR"


class ExternalBenchmarkCurveName1Code(SimpleText):
    min_length = 1
    max_length = 4


class IndexIdentification1(ISOModel):
    isin: ISINOct2015Identifier | None = Field(None, alias="ISIN")
    nm: Max350Text | None = Field(None, alias="Nm")
    indx: ExternalBenchmarkCurveName1Code | None = Field(None, alias="Indx")


class UnderlyingIdentification1Code(str, Enum):
    UKWN = "UKWN"
    BSKT = "BSKT"
    INDX = "INDX"


class GenericIdentification185(ISOModel):
    id: Max100Text = Field(alias="Id")
    schme_nm: Max35Text | None = Field(None, alias="SchmeNm")
    issr: Max35Text | None = Field(None, alias="Issr")


class UniqueProductIdentifier2Choice(ChoiceModel):
    id: Max52Text | None = Field(None, alias="Id")
    prtry: GenericIdentification185 | None = Field(None, alias="Prtry")


class SecurityIdentification41Choice(ChoiceModel):
    isin: ISINOct2015Identifier | None = Field(None, alias="ISIN")
    altrntv_instrm_id: Max52Text | None = Field(None, alias="AltrntvInstrmId")
    unq_pdct_idr: UniqueProductIdentifier2Choice | None = Field(None, alias="UnqPdctIdr")
    bskt: CustomBasket4 | None = Field(None, alias="Bskt")
    indx: IndexIdentification1 | None = Field(None, alias="Indx")
    othr: GenericIdentification184 | None = Field(None, alias="Othr")
    id_not_avlbl: UnderlyingIdentification1Code | None = Field(None, alias="IdNotAvlbl")


class TimeToMaturityPeriod1(ISOModel):
    start: MaturityTerm2 | None = Field(None, alias="Start")
    end: MaturityTerm2 | None = Field(None, alias="End")


class TimeToMaturity1Choice(ChoiceModel):
    prd: TimeToMaturityPeriod1 | None = Field(None, alias="Prd")
    spcl: SpecialPurpose2Code | None = Field(None, alias="Spcl")


class ExternalPartyRelationshipType1Code(SimpleText):
    min_length = 1
    max_length = 4


class TradeCounterpartyRelationship1Choice(ChoiceModel):
    cd: ExternalPartyRelationshipType1Code | None = Field(None, alias="Cd")
    prtry: Max100Text | None = Field(None, alias="Prtry")


class TradeCounterpartyType1Code(str, Enum):
    BENE = "BENE"
    BROK = "BROK"
    CLEM = "CLEM"
    EXEA = "EXEA"
    OTHC = "OTHC"
    REPC = "REPC"
    SBMA = "SBMA"
    ERFR = "ERFR"


class TradeCounterpartyRelationshipRecord1(ISOModel):
    start_rltsh_pty: TradeCounterpartyType1Code = Field(alias="StartRltshPty")
    end_rltsh_pty: TradeCounterpartyType1Code = Field(alias="EndRltshPty")
    rltsh_tp: TradeCounterpartyRelationship1Choice = Field(alias="RltshTp")
    desc: Max1000Text | None = Field(None, alias="Desc")


class TradeCounterpartyReport20(ISOModel):
    rptg_ctr_pty: Counterparty45 = Field(alias="RptgCtrPty")
    othr_ctr_pty: Counterparty46 = Field(alias="OthrCtrPty")
    brkr: OrganisationIdentification15Choice | None = Field(None, alias="Brkr")
    submitg_agt: OrganisationIdentification15Choice | None = Field(None, alias="SubmitgAgt")
    clr_mmb: PartyIdentification248Choice | None = Field(None, alias="ClrMmb")
    bnfcry: list[PartyIdentification248Choice] | None = Field(None, alias="Bnfcry")
    ntty_rspnsbl_for_rpt: OrganisationIdentification15Choice | None = Field(
        None, alias="NttyRspnsblForRpt"
    )
    exctn_agt: list[OrganisationIdentification15Choice] | None = Field(None, alias="ExctnAgt")
    rltsh_rcrd: list[TradeCounterpartyRelationshipRecord1] | None = Field(None, alias="RltshRcrd")


class PositionSetDimensions16(ISOModel):
    ctr_pty_id: TradeCounterpartyReport20 | None = Field(None, alias="CtrPtyId")
    val_ccy: ActiveOrHistoricCurrencyCode | None = Field(None, alias="ValCcy")
    coll: MarginCollateralReport4 | None = Field(None, alias="Coll")
    ctrct_tp: FinancialInstrumentContractType2Code | None = Field(None, alias="CtrctTp")
    asst_clss: ProductType4Code | None = Field(None, alias="AsstClss")
    undrlyg_instrm: SecurityIdentification41Choice | None = Field(None, alias="UndrlygInstrm")
    ntnl_ccy: ActiveOrHistoricCurrencyCode | None = Field(None, alias="NtnlCcy")
    ntnl_ccy_scnd_leg: ActiveOrHistoricCurrencyCode | None = Field(None, alias="NtnlCcyScndLeg")
    sttlm_ccy: ActiveOrHistoricCurrencyCode | None = Field(None, alias="SttlmCcy")
    sttlm_ccy_scnd_leg: ActiveOrHistoricCurrencyCode | None = Field(None, alias="SttlmCcyScndLeg")
    mstr_agrmt: MasterAgreement8 | None = Field(None, alias="MstrAgrmt")
    clrd: bool | None = Field(None, alias="Clrd")
    intra_grp: bool | None = Field(None, alias="IntraGrp")
    xchg_rate_bsis: ExchangeRateBasis1Choice | None = Field(None, alias="XchgRateBsis")
    optn_tp: OptionType2Code | None = Field(None, alias="OptnTp")
    tm_to_mtrty: TimeToMaturity1Choice | None = Field(None, alias="TmToMtrty")
    irs_tp: Max52Text | None = Field(None, alias="IRSTp")
    cdt: CreditDerivative7 | None = Field(None, alias="Cdt")
    cmmdty: AssetClassCommodity6Choice | None = Field(None, alias="Cmmdty")
    othr_pmt: OtherPayment6 | None = Field(None, alias="OthrPmt")


class NotionalAmount7(ISOModel):
    amt: ActiveOrHistoricCurrencyAnd19DecimalAmount | None = Field(None, alias="Amt")
    amt_in_fct: list[ActiveOrHistoricCurrencyAnd19DecimalAmount] | None = Field(
        None, alias="AmtInFct"
    )
    wghtd_avrg_dlta: Decimal | None = Field(None, alias="WghtdAvrgDlta")


class NotionalAmountLegs6(ISOModel):
    frst_leg: NotionalAmount7 | None = Field(None, alias="FrstLeg")
    scnd_leg: NotionalAmount7 | None = Field(None, alias="ScndLeg")


class PositionSetTotal2(ISOModel):
    nb_of_trds: Decimal | None = Field(None, alias="NbOfTrds")
    postv_val: ActiveOrHistoricCurrencyAnd19DecimalAmount | None = Field(None, alias="PostvVal")
    neg_val: ActiveOrHistoricCurrencyAnd19DecimalAmount | None = Field(None, alias="NegVal")
    ntnl: NotionalAmountLegs6 | None = Field(None, alias="Ntnl")
    othr_pmt_amt: list[ActiveOrHistoricCurrencyAnd19DecimalAmount] | None = Field(
        None, alias="OthrPmtAmt"
    )


class PositionSetBuyerAndSeller2(ISOModel):
    buyr: PositionSetTotal2 | None = Field(None, alias="Buyr")
    sellr: PositionSetTotal2 | None = Field(None, alias="Sellr")


class PositionSetMetrics14(ISOModel):
    ttl: PositionSetBuyerAndSeller2 | None = Field(None, alias="Ttl")
    clean: PositionSetBuyerAndSeller2 | None = Field(None, alias="Clean")


class PositionSet21(ISOModel):
    dmnsns: PositionSetDimensions16 = Field(alias="Dmnsns")
    mtrcs: PositionSetMetrics14 = Field(alias="Mtrcs")


class PositionSetCollateralDimensions3(ISOModel):
    ctr_pty_id: TradeCounterpartyReport20 | None = Field(None, alias="CtrPtyId")
    coll: MarginCollateralReport4 | None = Field(None, alias="Coll")
    initl_mrgn_pstd_ccy: ActiveOrHistoricCurrencyCode | None = Field(
        None, alias="InitlMrgnPstdCcy"
    )
    vartn_mrgn_pstd_ccy: ActiveOrHistoricCurrencyCode | None = Field(
        None, alias="VartnMrgnPstdCcy"
    )
    initl_mrgn_rcvd_ccy: ActiveOrHistoricCurrencyCode | None = Field(
        None, alias="InitlMrgnRcvdCcy"
    )
    vartn_mrgn_rcvd_ccy: ActiveOrHistoricCurrencyCode | None = Field(
        None, alias="VartnMrgnRcvdCcy"
    )
    xcss_coll_pstd_ccy: ActiveOrHistoricCurrencyCode | None = Field(None, alias="XcssCollPstdCcy")
    xcss_coll_rcvd_ccy: ActiveOrHistoricCurrencyCode | None = Field(None, alias="XcssCollRcvdCcy")


class PostedMarginOrCollateral6(ISOModel):
    initl_mrgn_pstd_pre_hrcut: ActiveOrHistoricCurrencyAnd20DecimalAmount | None = Field(
        None, alias="InitlMrgnPstdPreHrcut"
    )
    initl_mrgn_pstd_pst_hrcut: ActiveOrHistoricCurrencyAnd20DecimalAmount | None = Field(
        None, alias="InitlMrgnPstdPstHrcut"
    )
    vartn_mrgn_pstd_pre_hrcut: ActiveOrHistoricCurrencyAnd20DecimalAmount | None = Field(
        None, alias="VartnMrgnPstdPreHrcut"
    )
    vartn_mrgn_pstd_pst_hrcut: ActiveOrHistoricCurrencyAnd20DecimalAmount | None = Field(
        None, alias="VartnMrgnPstdPstHrcut"
    )
    xcss_coll_pstd: ActiveOrHistoricCurrencyAnd20DecimalAmount | None = Field(
        None, alias="XcssCollPstd"
    )


class ReceivedMarginOrCollateral6(ISOModel):
    initl_mrgn_rcvd_pre_hrcut: ActiveOrHistoricCurrencyAnd20DecimalAmount | None = Field(
        None, alias="InitlMrgnRcvdPreHrcut"
    )
    initl_mrgn_rcvd_pst_hrcut: ActiveOrHistoricCurrencyAnd20DecimalAmount | None = Field(
        None, alias="InitlMrgnRcvdPstHrcut"
    )
    vartn_mrgn_rcvd_pre_hrcut: ActiveOrHistoricCurrencyAnd20DecimalAmount | None = Field(
        None, alias="VartnMrgnRcvdPreHrcut"
    )
    vartn_mrgn_rcvd_pst_hrcut: ActiveOrHistoricCurrencyAnd20DecimalAmount | None = Field(
        None, alias="VartnMrgnRcvdPstHrcut"
    )
    xcss_coll_rcvd: ActiveOrHistoricCurrencyAnd20DecimalAmount | None = Field(
        None, alias="XcssCollRcvd"
    )


class PositionSetCollateralTotal2(ISOModel):
    nb_of_rpts: Decimal | None = Field(None, alias="NbOfRpts")
    pstd_mrgn_or_coll: PostedMarginOrCollateral6 | None = Field(None, alias="PstdMrgnOrColl")
    rcvd_mrgn_or_coll: ReceivedMarginOrCollateral6 | None = Field(None, alias="RcvdMrgnOrColl")


class PositionSetCollateralMetrics2(ISOModel):
    ttl: PositionSetCollateralTotal2 | None = Field(None, alias="Ttl")
    clean: PositionSetCollateralTotal2 | None = Field(None, alias="Clean")


class PositionSet22(ISOModel):
    dmnsns: PositionSetCollateralDimensions3 = Field(alias="Dmnsns")
    mtrcs: PositionSetCollateralMetrics2 = Field(alias="Mtrcs")


class PositionSetAggregated4(ISOModel):
    ref_dt: ISODate = Field(alias="RefDt")
    pos_set: list[PositionSet21] | None = Field(None, alias="PosSet")
    ccy_pos_set: list[PositionSet21] | None = Field(None, alias="CcyPosSet")
    coll_pos_set: list[PositionSet22] | None = Field(None, alias="CollPosSet")
    ccy_coll_pos_set: list[PositionSet22] | None = Field(None, alias="CcyCollPosSet")


class PositionSetAggregated2Choice(ChoiceModel):
    data_set_actn: ReportPeriodActivity1Code | None = Field(None, alias="DataSetActn")
    rpt: PositionSetAggregated4 | None = Field(None, alias="Rpt")


@message("auth.090.001.02", "DerivsTradPosSetRpt")
class DerivativesTradePositionSetReportV02(ISOModel):
    """Message root of auth.090.001.02, carried in the <DerivsTradPosSetRpt> element."""

    aggtd_pos: PositionSetAggregated2Choice = Field(alias="AggtdPos")
    splmtry_data: list[SupplementaryData1] | None = Field(None, alias="SplmtryData")


class Max20PositiveNumber(SimpleDecimal):
    min_inclusive = Decimal("0")
