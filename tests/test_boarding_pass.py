import dataclasses
from datetime import date, datetime, timezone

import pytest

from bcbp import BoardingPass, Leg, decode
from conftest import THREE_LEGS_CONDITIONAL


@pytest.mark.parametrize("flight_day, year, expected", [
    (1, 2017, date(2017, 1, 1)),
    (59, 2020, date(2020, 2, 28)),
    (60, 2020, date(2020, 2, 29)),
    (60, 2021, date(2021, 3, 1)),
    (207, 2017, date(2017, 7, 26)),
    (365, 2017, date(2017, 12, 31)),
    (365, 2020, date(2020, 12, 30)),
])
def test_flight_date(flight_day, year, expected):
    assert Leg(flight_day=flight_day).flight_date(year) == expected


@pytest.mark.parametrize("flight_day", [0, 366, 999])
def test_flight_date_out_of_range_is_january_1(flight_day):
    assert Leg(flight_day=flight_day).flight_date(2017) == date(2017, 1, 1)


def test_flight_date_current_year():
    year = datetime.now(timezone.utc).year
    assert Leg(flight_day=1).flight_date_current_year().year in (
        year, year + 1
    )


def test_aligned_values():
    leg = Leg(flight_day=7, seat="1Z", sequence=42)
    assert leg.flight_day_aligned == "007"
    assert leg.seat_aligned == "001Z"
    assert leg.sequence_aligned == "0042"


def test_unset_aligned_values():
    leg = Leg()
    assert leg.flight_day_aligned == ""
    assert leg.seat_aligned == ""
    assert leg.sequence_aligned == ""


def test_leg_str():
    leg = Leg(source_airport="JFK", destination_airport="SVO",
        airline_code="SU", flight_number="1234", flight_day=1)
    assert str(leg) == "001 SU 1234 JFK → SVO"


def test_name():
    assert BoardingPass(passenger_last_name="JOHN",
        passenger_first_name="SMITH").name == "JOHN/SMITH"
    assert BoardingPass(passenger_last_name="JOHN").name == "JOHN"


def test_legs_are_stored_as_tuple():
    bp = BoardingPass(legs=[Leg(pnr="ABCDEF")])
    assert bp.legs == (Leg(pnr="ABCDEF"),)
    assert bp.leg_count == 1


def test_pass_is_immutable():
    bp = decode(THREE_LEGS_CONDITIONAL)
    with pytest.raises(dataclasses.FrozenInstanceError):
        bp.ticket_flag = "X"
    with pytest.raises(dataclasses.FrozenInstanceError):
        bp.legs[0].seat = "1A"


def test_mandatory_drops_conditional_items():
    bp = decode(THREE_LEGS_CONDITIONAL).mandatory()
    assert bp.conditional_data is None
    assert bp.passenger_type is None
    assert bp.security_data is None
    assert all(leg.airline_numeric_code is None for leg in bp.legs)
    assert all(leg.airline_data is None for leg in bp.legs)
    assert [leg.flight_number for leg in bp.legs] == ["1234", "5678", "9876"]
