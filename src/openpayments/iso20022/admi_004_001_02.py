"""
admi.004.001.02 - SystemEventNotificationV02

System event notification, sent by a system to its participants to announce an event such as the
start or end of a business day.

Only the types specific to this message are declared here; shared types come from
openpayments.iso20022.common.
"""

from pydantic import Field

from openpayments.domain.models import ISOModel
from openpayments.domain.registry import message
from openpayments.iso20022.common import (
    ISODateTime,
    Max1000Text,
    Max35Text,
    Max4AlphaNumericText,
)


class Event2(ISOModel):
    evt_cd: Max4AlphaNumericText = Field(alias="EvtCd")
    evt_param: list[Max35Text] | None = Field(None, alias="EvtParam")
    evt_desc: Max1000Text | None = Field(None, alias="EvtDesc")
    evt_tm: ISODateTime | None = Field(None, alias="EvtTm")


@message("admi.004.001.02", "SysEvtNtfctn")
class SystemEventNotificationV02(ISOModel):
    """Message root of admi.004.001.02, carried in the <SysEvtNtfctn> element."""

    evt_inf: Event2 = Field(alias="EvtInf")
