import json

import pytest

from numerals.__main__ import check_value, convert_value, main


def test_convert_value():
    assert convert_value('1994') == 'MCMXCIV'
    assert convert_value('+4') == 'IV'
    assert convert_value('MCMXCIV') == 1994


def test_check_value():
    assert check_value('3999') == 'ok'
    assert check_value('XL') == 'ok'


def test_main(capsys):
    main(['1994', 'MMXXIV'])
    out, err = capsys.readouterr()
    assert out == 'MCMXCIV\n2024\n'
    assert err == ''


def test_main_with_errors(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(['0', 'IL', 'XII', '-5'])
    assert excinfo.value.code == 1
    out, err = capsys.readouterr()
    assert out == '12\n'
    assert err.splitlines() == [
        '!> 0: Invalid arabic number. Valid numbers are 1 - 3999',
        '!> IL: Invalid numeral subtraction',
        '!> -5: Invalid arabic number. Valid numbers are 1 - 3999',
    ]


def test_main_json(capsys):
    with pytest.raises(SystemExit):
        main(['--json', '9', 'VV'])
    out, err = capsys.readouterr()
    assert json.loads(out) == [
        {'input': '9', 'output': 'IX', 'error': None},
        {'input': 'VV', 'output': None, 'error': 'Invalid number of consecutive numerals'},
    ]


def test_main_check(capsys):
    main(['--check', '1', 'MMM'])
    out, err = capsys.readouterr()
    assert out == 'ok\nok\n'
    with pytest.raises(SystemExit):
        main(['--check', 'ABC'])
    out, err = capsys.readouterr()
    assert out == ''
    assert err == '!> ABC: Invalid numeral\n'
