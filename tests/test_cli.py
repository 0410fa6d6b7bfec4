# tests/test_cli.py

import pytest

from ethcal.cli import main


def test_to_gregorian(capsys):
    assert main(["to-gregorian", "2004-5-21"]) == 0
    assert capsys.readouterr().out.strip() == "2012-01-30"


def test_to_gregorian_coptic(capsys):
    assert main(["to-gregorian", "1-1-1", "--era", "coptic"]) == 0
    assert capsys.readouterr().out.strip() == "0284-08-29"


def test_to_ethiopian(capsys):
    assert main(["to-ethiopian", "2024-12-25"]) == 0
    assert capsys.readouterr().out.strip() == "ታህሳስ 16, 2017"

    assert main(["to-ethiopian", "2024-12-25", "--names", "english"]) == 0
    assert capsys.readouterr().out.strip() == "Tahsas 16, 2017"

    assert main(["to-ethiopian", "2024-12-25", "--format", "iso"]) == 0
    assert capsys.readouterr().out.strip() == "2017-4-16"


def test_invalid_input_exits_2(capsys):
    assert main(["to-gregorian", "2016-13-6"]) == 2
    err = capsys.readouterr().err
    assert "invalid day 6" in err

    assert main(["to-ethiopian", "2024-12-25", "--names", "klingon"]) == 2
    assert "klingon" in capsys.readouterr().err


def test_day_shorthand(capsys):
    assert main(["2025-09-07", "--attr", "names"]) == 0
    out = capsys.readouterr().out
    assert "EthiopianDate(year=2017, month=13, day=2" in out
    assert "ጳጉሜ" in out


def test_verbose_logs_conversion(caplog):
    with caplog.at_level("DEBUG", logger="ethcal.api"):
        assert main(["-v", "to-gregorian", "2004-5-21"]) == 0
    assert any("JDN 2455957" in r.getMessage() for r in caplog.records)


def test_new_years(capsys):
    assert main(["new-years", "--from-year", "2015", "--to-year", "2017", "--names", "english"]) == 0
    out = capsys.readouterr().out
    assert "2022-09-11" in out
    assert "2023-09-12" in out
    assert "2024-09-11" in out
    assert "Tuesday" in out  # 2023-09-12


def test_round_trip(capsys):
    assert main(["round-trip", "--N", "500", "--start-year", "1", "--end-year", "3000"]) == 0
    assert "All round-trip tests passed." in capsys.readouterr().out


def test_pretty_month(capsys):
    assert main(["pretty-month", "--eth", "2017", "13"]) == 0
    out = capsys.readouterr().out
    assert "ጳጉሜ 2017" in out
    assert "09-06" in out
    assert "09-10" in out


def test_subcommand_required():
    with pytest.raises(SystemExit):
        main([])
