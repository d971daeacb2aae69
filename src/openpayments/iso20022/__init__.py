"""
ISO 20022 catalog package.

Importing this package imports every message module, which registers each
message root with openpayments.domain.registry. common and remittance hold
components only and register nothing.
"""

from . import (
    acmt_005_001_06,
    acmt_014_001_05,
    admi_004_001_02,
    auth_015_001_02,
    auth_019_001_04,
    auth_059_001_01,
    auth_090_001_02,
    auth_105_001_01,
    camt_006_001_11,
    camt_013_001_04,
    camt_054_001_08,
    camt_081_001_02,
    camt_086_001_05,
    camt_111_001_01,
    common,
    reda_015_001_01,
    reda_043_001_02,
    remittance,
)

__all__ = [
    "acmt_005_001_06",
    "acmt_014_001_05",
    "admi_004_001_02",
    "auth_015_001_02",
    "auth_019_001_04",
    "auth_059_001_01",
    "auth_090_001_02",
    "auth_105_001_01",
    "camt_006_001_11",
    "camt_013_001_04",
    "camt_054_001_08",
    "camt_081_001_02",
    "camt_086_001_05",
    "camt_111_001_01",
    "common",
    "reda_015_001_01",
    "reda_043_001_02",
    "remittance",
]
