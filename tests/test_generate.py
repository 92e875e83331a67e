import random
from datetime import date, datetime

import pytest

from kennitala.classify import is_robot
from kennitala.generate import GenerateOptions, generate_kennitala
from kennitala.parse import Options, is_valid_kennitala, parse_kennitala
from kennitala.util.dates import birth_date_from_cleaned

def test_default_person():
    rng = random.Random(1)
    for _ in range(200):
        kt = generate_kennitala(rng=rng)
        assert is_valid_kennitala(kt)
        assert kt[0] in "0123"
        assert 20 <= int(kt[6:8]) <= 99
        assert birth_date_from_cleaned(kt) is not None

def test_company_1000_times():
    rng = random.Random(2)
    for _ in range(1000):
        kt = generate_kennitala(GenerateOptions(type="company"), rng)
        assert kt[0] in "4567"
        assert is_valid_kennitala(kt)
        assert parse_kennitala(kt, Options(type="company")) is not None

def test_company_birth_date_offset():
    d = date(2005, 3, 15)
    kt = generate_kennitala(GenerateOptions(type="company", birth_date=d), random.Random(3))
    assert kt[:6] == "550305"
    assert int(kt[0:2]) % 40 == d.day
    assert kt[9] == "0"
    assert birth_date_from_cleaned(kt) == d

def test_person_birth_date():
    d = date(1850, 12, 31)
    kt = generate_kennitala(GenerateOptions(type="person", birth_date=d), random.Random(4))
    assert kt[:6] == "311250" and kt[9] == "8"
    assert parse_kennitala(kt, Options(strict_date=True)).birth_date == d

def test_datetime_accepted():
    kt = generate_kennitala(GenerateOptions(birth_date=datetime(1999, 7, 4, 12, 30)), random.Random(5))
    assert kt[:6] == "040799"

def test_out_of_range_birth_date_falls_back():
    today = date.today()
    for d in (date(1700, 1, 1), date(2100, 1, 1)):
        kt = generate_kennitala(GenerateOptions(birth_date=d), random.Random(6))
        assert is_valid_kennitala(kt)
        bday = birth_date_from_cleaned(kt)
        assert today.year - 101 <= bday.year <= today.year
    # организации не старше 1969
    kt = generate_kennitala(GenerateOptions(type="company", birth_date=date(1950, 1, 1)), random.Random(7))
    assert birth_date_from_cleaned(kt).year >= today.year - 51

def test_temporary():
    rng = random.Random(8)
    for _ in range(100):
        kt = generate_kennitala(GenerateOptions(temporary=True), rng)
        assert len(kt) == 10 and kt.isdigit() and kt[0] in "89"
        assert parse_kennitala(kt).temporary is True

def test_robot():
    rng = random.Random(9)
    for _ in range(50):
        kt = generate_kennitala(GenerateOptions(robot=True), rng)
        assert is_robot(kt)
        assert not is_valid_kennitala(kt)
        assert is_valid_kennitala(kt, Options(robot=True))

def test_company_ignores_temporary_and_robot():
    kt = generate_kennitala(GenerateOptions(type="company", temporary=True, robot=True), random.Random(10))
    assert kt[0] in "4567"
    assert is_valid_kennitala(kt)

def test_bad_type():
    with pytest.raises(ValueError):
        GenerateOptions(type="robot")
