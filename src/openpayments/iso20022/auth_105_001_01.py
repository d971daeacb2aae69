"""
auth.105.001.01 - SecuritiesFinancingReportingPositionSetReportV01

Securities financing reporting position set report, sent by a trade repository to an authority with
aggregated position sets of securities financing transactions.

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
    ActiveOrHistoricCurrencyAnd20DecimalAmount,
    ActiveOrHistoricCurrencyAndAmount,
    ActiveOrHistoricCurrencyCode,
    CountryCode,
    ExternalAgreementType1Code,
    ISINOct2015Identifier,
    ISODate,
    MaturityTerm2,
    Max15NumericText,
    Max35Text,
    Max52Text,
    NoReasonCode,
    OrganisationIdentification15Choice,
    ReportPeriodActivity1Code,
    SpecialPurpose2Code,
    SupplementaryData1,
)


class AmountAndDirection107(ISOModel):
    amt: ActiveOrHistoricCurrencyAnd20DecimalAmount = Field(alias="Amt")
    sgn: bool | None = Field(None, alias="Sgn")


class AmountAndDirection53(ISOModel):
    amt: ActiveOrHistoricCurrencyAndAmount = Field(alias="Amt")
    sgn: bool | None = Field(None, alias="Sgn")


class CFIOct2015Identifier(SimpleText):
    pattern = r"[A-Z]{6,6}"


class CollateralQualityType1Code(str, Enum):
    INVG = "INVG"
    NIVG = "NIVG"
    NOTR = "NOTR"
    NOAP = "NOAP"


class CollateralType6Code(str, Enum):
    GBBK = "GBBK"
    BOND = "BOND"
    CASH = "CASH"
    COMM = "COMM"
    INSU = "INSU"
    LCRE = "LCRE"
    OTHR = "OTHR"
    PHYS = "PHYS"
    SECU = "SECU"
    STCF = "STCF"


class TimeToMaturityPeriod2(ISOModel):
    start: MaturityTerm2 | None = Field(None, alias="Start")
    end: MaturityTerm2 | None = Field(None, alias="End")


class TimeToMaturity2Choice(ChoiceModel):
    prd: TimeToMaturityPeriod2 | None = Field(None, alias="Prd")
    spcl: SpecialPurpose2Code | None = Field(None, alias="Spcl")


class ContractTerm6Choice(ChoiceModel):
    opn: bool | None = Field(None, alias="Opn")
    fxd: TimeToMaturity2Choice | None = Field(None, alias="Fxd")


class IssuerJurisdiction1Choice(ChoiceModel):
    ctry_cd: CountryCode | None = Field(None, alias="CtryCd")
    othr: Max35Text | None = Field(None, alias="Othr")


class TradeRepositoryReportingType1Code(str, Enum):
    SWOS = "SWOS"
    TWOS = "TWOS"


class ReconciliationFlag2(ISOModel):
    rpt_tp: TradeRepositoryReportingType1Code | None = Field(None, alias="RptTp")
    both_ctr_pties_rptg: bool | None = Field(None, alias="BothCtrPtiesRptg")
    paird_sts: bool | None = Field(None, alias="PairdSts")
    ln_rcncltn_sts: bool | None = Field(None, alias="LnRcncltnSts")
    coll_rcncltn_sts: bool | None = Field(None, alias="CollRcncltnSts")
    mod_sts: bool | None = Field(None, alias="ModSts")


class ReinvestmentType1Code(str, Enum):
    OTHR = "OTHR"
    OCMP = "OCMP"
    MMFT = "MMFT"
    REPM = "REPM"
    SDPU = "SDPU"


class ReinvestedCashTypeAndAmount2(ISOModel):
    tp: ReinvestmentType1Code = Field(alias="Tp")
    rinvstd_csh_ccy: ActiveOrHistoricCurrencyCode = Field(alias="RinvstdCshCcy")


class ExternalSecuritiesLendingType1Code(SimpleText):
    min_length = 1
    max_length = 4


class SecuritiesLendingType3Choice(ChoiceModel):
    cd: ExternalSecuritiesLendingType1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class CollateralData33(ISOModel):
    net_xpsr_collstn_ind: bool | None = Field(None, alias="NetXpsrCollstnInd")
    cmpnt_tp: CollateralType6Code | None = Field(None, alias="CmpntTp")
    csh_coll_ccy: ActiveOrHistoricCurrencyCode | None = Field(None, alias="CshCollCcy")
    pric_ccy: ActiveOrHistoricCurrencyCode | None = Field(None, alias="PricCcy")
    qlty: CollateralQualityType1Code | None = Field(None, alias="Qlty")
    mtrty: ContractTerm6Choice | None = Field(None, alias="Mtrty")
    issr_jursdctn: IssuerJurisdiction1Choice | None = Field(None, alias="IssrJursdctn")
    tp: SecuritiesLendingType3Choice | None = Field(None, alias="Tp")
    trad_rpstry: OrganisationIdentification15Choice | None = Field(None, alias="TradRpstry")
    rcncltn_flg: ReconciliationFlag2 | None = Field(None, alias="RcncltnFlg")
    rinvstd_csh: ReinvestedCashTypeAndAmount2 | None = Field(None, alias="RinvstdCsh")


class CollateralRole1Code(str, Enum):
    GIVE = "GIVE"
    TAKE = "TAKE"


class CounterpartyIdentification10(ISOModel):
    id: OrganisationIdentification15Choice | None = Field(None, alias="Id")
    sd: CollateralRole1Code | None = Field(None, alias="Sd")


class CounterpartyData86(ISOModel):
    rptg_ctr_pty: CounterpartyIdentification10 | None = Field(None, alias="RptgCtrPty")
    othr_ctr_pty: OrganisationIdentification15Choice | None = Field(None, alias="OthrCtrPty")
    trpty_agt: bool | None = Field(None, alias="TrptyAgt")
    agt_lndr: bool | None = Field(None, alias="AgtLndr")


class PrincipalAmount3(ISOModel):
    val_dt_amt: ActiveOrHistoricCurrencyAndAmount | None = Field(None, alias="ValDtAmt")
    mtrty_dt_amt: ActiveOrHistoricCurrencyAndAmount | None = Field(None, alias="MtrtyDtAmt")


class ExposureMetrics4(ISOModel):
    prncpl_amt: PrincipalAmount3 | None = Field(None, alias="PrncplAmt")
    ln_val: ActiveOrHistoricCurrencyAndAmount | None = Field(None, alias="LnVal")
    mkt_val: AmountAndDirection53 | None = Field(None, alias="MktVal")
    outsdng_mrgn_ln_amt: ActiveOrHistoricCurrencyAndAmount | None = Field(
        None, alias="OutsdngMrgnLnAmt"
    )
    shrt_mkt_val_amt: ActiveOrHistoricCurrencyAndAmount | None = Field(None, alias="ShrtMktValAmt")
    mrgn_ln: ActiveOrHistoricCurrencyAndAmount | None = Field(None, alias="MrgnLn")
    csh_coll_amt: AmountAndDirection53 | None = Field(None, alias="CshCollAmt")
    coll_mkt_val: AmountAndDirection53 | None = Field(None, alias="CollMktVal")


class ExposureMetrics5(ISOModel):
    csh_coll_amt: AmountAndDirection53 | None = Field(None, alias="CshCollAmt")
    coll_mkt_val: AmountAndDirection53 | None = Field(None, alias="CollMktVal")


class PostedMarginOrCollateral4(ISOModel):
    initl_mrgn_pstd: ActiveOrHistoricCurrencyAndAmount | None = Field(None, alias="InitlMrgnPstd")
    vartn_mrgn_pstd: ActiveOrHistoricCurrencyAndAmount | None = Field(None, alias="VartnMrgnPstd")
    xcss_coll_pstd: ActiveOrHistoricCurrencyAndAmount | None = Field(None, alias="XcssCollPstd")


class ExposureMetrics6(ISOModel):
    pstd_mrgn_or_coll: PostedMarginOrCollateral4 | None = Field(None, alias="PstdMrgnOrColl")


class ExposureType10Code(str, Enum):
    SBSC = "SBSC"
    MGLD = "MGLD"
    SLEB = "SLEB"
    REPO = "REPO"


class ExternalRatesAndTenors1Code(SimpleText):
    min_length = 1
    max_length = 4


class Rates1Choice(ChoiceModel):
    fxd: NoReasonCode | None = Field(None, alias="Fxd")
    fltg: ExternalRatesAndTenors1Code | None = Field(None, alias="Fltg")


class QuantityNominalValue2Choice(ChoiceModel):
    qty: Decimal | None = Field(None, alias="Qty")
    nmnl_val: AmountAndDirection53 | None = Field(None, alias="NmnlVal")


class PriceStatus1Code(str, Enum):
    PNDG = "PNDG"
    NOAP = "NOAP"


class SecuritiesTransactionPrice5(ISOModel):
    val: Decimal | None = Field(None, alias="Val")
    tp: Max35Text | None = Field(None, alias="Tp")


class SecuritiesTransactionPrice19Choice(ChoiceModel):
    mntry_val: AmountAndDirection107 | None = Field(None, alias="MntryVal")
    unit: Decimal | None = Field(None, alias="Unit")
    pctg: Decimal | None = Field(None, alias="Pctg")
    yld: Decimal | None = Field(None, alias="Yld")
    dcml: Decimal | None = Field(None, alias="Dcml")
    pdg_pric: PriceStatus1Code | None = Field(None, alias="PdgPric")
    othr: SecuritiesTransactionPrice5 | None = Field(None, alias="Othr")


class SecurityIssuer4(ISOModel):
    id: OrganisationIdentification15Choice | None = Field(None, alias="Id")
    jursdctn_ctry: CountryCode = Field(alias="JursdctnCtry")


class Security49(ISOModel):
    id: ISINOct2015Identifier | None = Field(None, alias="Id")
    clssfctn_tp: CFIOct2015Identifier | None = Field(None, alias="ClssfctnTp")
    qty_or_nmnl_val: QuantityNominalValue2Choice | None = Field(None, alias="QtyOrNmnlVal")
    unit_pric: SecuritiesTransactionPrice19Choice | None = Field(None, alias="UnitPric")
    mkt_val: AmountAndDirection53 | None = Field(None, alias="MktVal")
    qlty: CollateralQualityType1Code | None = Field(None, alias="Qlty")
    mtrty: str | None = Field(None, alias="Mtrty")
    issr: SecurityIssuer4 | None = Field(None, alias="Issr")
    tp: list[SecuritiesLendingType3Choice] | None = Field(None, alias="Tp")
    exclsv_arrgmnt: bool | None = Field(None, alias="ExclsvArrgmnt")


class SpecialCollateral1Code(str, Enum):
    GENE = "GENE"
    SPEC = "SPEC"


class TradeMarket2Code(str, Enum):
    DMST = "DMST"
    FRGN = "FRGN"


class TradingVenueType1Choice(ChoiceModel):
    on_vn: TradeMarket2Code | None = Field(None, alias="OnVn")
    off_vn: NoReasonCode | None = Field(None, alias="OffVn")


class LoanData134(ISOModel):
    ctrct_tp: ExposureType10Code | None = Field(None, alias="CtrctTp")
    clrd: bool | None = Field(None, alias="Clrd")
    prtfl_cd: Max52Text | None = Field(None, alias="PrtflCd")
    tradg_vn: TradingVenueType1Choice | None = Field(None, alias="TradgVn")
    mstr_agrmt_tp: ExternalAgreementType1Code | None = Field(None, alias="MstrAgrmtTp")
    mtrty_dt: ISODate | None = Field(None, alias="MtrtyDt")
    gnl_coll: SpecialCollateral1Code | None = Field(None, alias="GnlColl")
    term: ContractTerm6Choice | None = Field(None, alias="Term")
    rates: Rates1Choice | None = Field(None, alias="Rates")
    prncpl_amt_ccy: ActiveOrHistoricCurrencyCode | None = Field(None, alias="PrncplAmtCcy")
    pric_ccy: ActiveOrHistoricCurrencyCode | None = Field(None, alias="PricCcy")
    scty: Security49 | None = Field(None, alias="Scty")
    outsdng_mrgn_ln_ccy: ActiveOrHistoricCurrencyCode | None = Field(
        None, alias="OutsdngMrgnLnCcy"
    )


class PositionSetDimensions14(ISOModel):
    ctr_pty_data: CounterpartyData86 | None = Field(None, alias="CtrPtyData")
    ln_data: LoanData134 | None = Field(None, alias="LnData")
    coll_data: CollateralData33 | None = Field(None, alias="CollData")
    otlrs_incl: bool | None = Field(None, alias="OtlrsIncl")


class VolumeMetrics5(ISOModel):
    nb_of_txs: Max15NumericText | None = Field(None, alias="NbOfTxs")
    xpsr: ExposureMetrics4 | None = Field(None, alias="Xpsr")


class PositionSetMetrics7(ISOModel):
    vol_mtrcs: VolumeMetrics5 = Field(alias="VolMtrcs")


class PositionSet16(ISOModel):
    dmnsns: PositionSetDimensions14 = Field(alias="Dmnsns")
    mtrcs: PositionSetMetrics7 = Field(alias="Mtrcs")


class SecuritiesTransactionPrice18Choice(ChoiceModel):
    mntry_val: AmountAndDirection107 | None = Field(None, alias="MntryVal")
    pctg: Decimal | None = Field(None, alias="Pctg")
    dcml: Decimal | None = Field(None, alias="Dcml")
    bsis_pts: Decimal | None = Field(None, alias="BsisPts")


class Rates3(ISOModel):
    fxd: Decimal | None = Field(None, alias="Fxd")
    fltg: Decimal | None = Field(None, alias="Fltg")
    buy_sell_bck: SecuritiesTransactionPrice18Choice | None = Field(None, alias="BuySellBck")


class PriceMetrics3(ISOModel):
    rates: Rates3 | None = Field(None, alias="Rates")
    lndg_fee: Decimal | None = Field(None, alias="LndgFee")


class PositionSetMetrics13(ISOModel):
    vol_mtrcs: VolumeMetrics5 = Field(alias="VolMtrcs")
    pric_mtrcs: PriceMetrics3 | None = Field(None, alias="PricMtrcs")


class PositionSet17(ISOModel):
    dmnsns: PositionSetDimensions14 = Field(alias="Dmnsns")
    mtrcs: PositionSetMetrics13 = Field(alias="Mtrcs")


class VolumeMetrics6(ISOModel):
    postv: ExposureMetrics5 | None = Field(None, alias="Postv")
    neg: ExposureMetrics5 | None = Field(None, alias="Neg")


class PositionSetMetrics12(ISOModel):
    vol_mtrcs: VolumeMetrics6 | None = Field(None, alias="VolMtrcs")
    hrcut_or_mrgn: Decimal | None = Field(None, alias="HrcutOrMrgn")
    qty_or_nmnl_amt: QuantityNominalValue2Choice | None = Field(None, alias="QtyOrNmnlAmt")


class PositionSet18(ISOModel):
    dmnsns: PositionSetDimensions14 = Field(alias="Dmnsns")
    mtrcs: PositionSetMetrics12 = Field(alias="Mtrcs")


class PositionSetDimensions12(ISOModel):
    rptg_ctr_pty: OrganisationIdentification15Choice | None = Field(None, alias="RptgCtrPty")
    coll_data: CollateralData33 | None = Field(None, alias="CollData")
    otlrs_incl: bool | None = Field(None, alias="OtlrsIncl")


class ReuseValue1Choice(ChoiceModel):
    actl: ActiveOrHistoricCurrencyAndAmount | None = Field(None, alias="Actl")
    estmtd: ActiveOrHistoricCurrencyAndAmount | None = Field(None, alias="Estmtd")


class VolumeMetrics4(ISOModel):
    reuse_val: ReuseValue1Choice | None = Field(None, alias="ReuseVal")
    rinvstd_csh_amt: ActiveOrHistoricCurrencyAndAmount | None = Field(None, alias="RinvstdCshAmt")


class PositionSetMetrics11(ISOModel):
    vol_mtrcs: VolumeMetrics4 | None = Field(None, alias="VolMtrcs")
    csh_rinvstmt_rate: Decimal | None = Field(None, alias="CshRinvstmtRate")


class PositionSet19(ISOModel):
    dmnsns: PositionSetDimensions12 = Field(alias="Dmnsns")
    mtrcs: PositionSetMetrics11 = Field(alias="Mtrcs")


class PositionSetDimensions15(ISOModel):
    rptg_ctr_pty: OrganisationIdentification15Choice | None = Field(None, alias="RptgCtrPty")
    othr_ctr_pty: OrganisationIdentification15Choice | None = Field(None, alias="OthrCtrPty")
    coll_prtfl_id: Max52Text | None = Field(None, alias="CollPrtflId")
    otlrs_incl: bool | None = Field(None, alias="OtlrsIncl")


class PositionSetMetrics10(ISOModel):
    vol_mtrcs: ExposureMetrics6 | None = Field(None, alias="VolMtrcs")


class PositionSet20(ISOModel):
    dmnsns: PositionSetDimensions15 = Field(alias="Dmnsns")
    mtrcs: PositionSetMetrics10 = Field(alias="Mtrcs")


class NamedPosition3(ISOModel):
    ref_dt: ISODate = Field(alias="RefDt")
    gnl_inf: list[PositionSet16] | None = Field(None, alias="GnlInf")
    ln: list[PositionSet17] | None = Field(None, alias="Ln")
    coll: list[PositionSet18] | None = Field(None, alias="Coll")
    mrgn: list[PositionSet20] | None = Field(None, alias="Mrgn")
    reuse: list[PositionSet19] | None = Field(None, alias="Reuse")


class PositionSetReport3Choice(ChoiceModel):
    data_set_actn: ReportPeriodActivity1Code | None = Field(None, alias="DataSetActn")
    rpt: NamedPosition3 | None = Field(None, alias="Rpt")


@message("auth.105.001.01", "SctiesFincgRptgPosSetRpt")
class SecuritiesFinancingReportingPositionSetReportV01(ISOModel):
    """Message root of auth.105.001.01, carried in the <SctiesFincgRptgPosSetRpt> element."""

    aggtd_poss: PositionSetReport3Choice = Field(alias="AggtdPoss")
    splmtry_data: list[SupplementaryData1] | None = Field(None, alias="SplmtryData")
