import pytest

from kennitala.classify import (
    ROBOT_KT_NUMS, is_company, is_person, is_robot, is_temporary, robot_kennitala, subject_type,
)

def test_first_digit_split():
    for d in "012389":
        assert is_person(d + "101902079")
        assert not is_company(d + "101902079")
    for d in "4567":
        assert is_company(d + "503050039")
        assert subject_type(d + "503050039") == "company"
    assert is_temporary("8012345678") and is_temporary("9012345678")
    assert not is_temporary("0101902079")

def test_robot_codes():
    assert len(ROBOT_KT_NUMS) == 14
    for n in ROBOT_KT_NUMS:
        assert is_robot(robot_kennitala(n))
    assert not is_robot("0101302139")
    assert not is_robot("0101302128")
    assert not is_robot("0101902079")

def test_robot_unknown_number():
    with pytest.raises(ValueError):
        robot_kennitala(213)
