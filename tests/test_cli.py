"""Command-line interface."""

import json

import pytest

from openpayments import __version__
from openpayments.main import main


@pytest.fixture
def document(tmp_path, camt054_xml):
    path = tmp_path / "camt054.xml"
    path.write_bytes(camt054_xml)
    return path


def test_validate_ok(document, capsys):
    assert main(["validate", str(document)]) == 0
    assert "OK (camt.054.001.08)" in capsys.readouterr().out


def test_validate_failure_sets_exit_status(document, tmp_path, capsys, camt054_xml):
    bad = tmp_path / "bad.xml"
    bad.write_bytes(camt054_xml.replace(b"EUR", b"euro"))
    assert main(["validate", str(document), str(bad)]) == 1
    out = capsys.readouterr().out
    assert f"{document}: OK" in out
    assert f"{bad}: FAIL [1005] Ntfctn[0].Ntry[0].Amt.Ccy:" in out


def test_validate_undecodable(tmp_path, capsys):
    path = tmp_path / "broken.xml"
    path.write_bytes(b"<Document>")
    assert main(["validate", str(path)]) == 1
    assert "FAIL" in capsys.readouterr().out


def test_convert_json(document, capsys):
    assert main(["convert", str(document)]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["GrpHdr"]["MsgId"] == "MSG-0001"
    assert data["Ntfctn"][0]["Ntry"][0]["Amt"] == {"Ccy": "EUR", "Value": "125.50"}


def test_convert_xml(document, capsysbinary):
    assert main(["convert", str(document), "--format", "xml"]) == 0
    assert b"<BkToCstmrDbtCdtNtfctn>" in capsysbinary.readouterr().out


def test_convert_undecodable(tmp_path, capsys):
    path = tmp_path / "broken.xml"
    path.write_bytes(b"<Document/>")
    assert main(["convert", str(path)]) == 1
    assert "namespace" in capsys.readouterr().err


def test_messages(capsys):
    assert main(["messages"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 16
    assert lines[0].split("\t") == [
        "acmt.005.001.06",
        "ReqForAcctMgmtStsRpt",
        "RequestForAccountManagementStatusReportV06",
    ]


def test_version(capsys):
    with pytest.raises(SystemExit):
        main(["--version"])
    assert __version__ in capsys.readouterr().out


def test_command_required():
    with pytest.raises(SystemExit):
        main([])
