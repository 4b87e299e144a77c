# tests/test_cli.py

from datetime import date
from unittest.mock import patch

from calnep import cli


def test_months(capsys):
    assert cli.main(["months", "--lang", "en"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 12
    assert out[0].split() == ["0", "Baisakh"]

def test_weekdays_long(capsys):
    assert cli.main(["weekdays", "--lang", "en", "--long"]) == 0
    assert "Sunday" in capsys.readouterr().out

def test_years(capsys):
    assert cli.main(["years", "--lang", "en"]) == 0
    out = capsys.readouterr().out.split()
    assert out[0] == "2000" and out[-1] == "2089"

def test_parse_valid(capsys):
    assert cli.main(["parse", "2081/03/05", "--lang", "en"]) == 0
    assert "id=2081/2/5" in capsys.readouterr().out

def test_parse_invalid(capsys):
    assert cli.main(["parse", "2081/5", "--lang", "en"]) == 1
    assert "invalid date" in capsys.readouterr().err

def test_format(capsys):
    assert cli.main(["format", "2081", "2", "5", "--lang", "ne"]) == 0
    assert capsys.readouterr().out.strip() == "२०८१/०३/०५"

def test_today(capsys):
    with patch("calnep.engines.converter.local_today", return_value=date(2024, 5, 20)):
        assert cli.main(["today", "--lang", "en"]) == 0
    assert capsys.readouterr().out.startswith("2081/02/04")

def test_month_page(capsys):
    assert cli.main(["month", "2081", "1", "--lang", "en"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Jestha 2081"
    assert out[1].split()[0] == "Sun"
    # leading days of Baisakh are parenthesized
    assert out[3].split()[:3] == ["(30)", "(31)", "1"]

def test_table(capsys):
    assert cli.main(["table", "--from-year", "2080", "--to-year", "2082"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0].startswith("Year")
    assert out[2].split()[:2] == ["2081", "366"]
