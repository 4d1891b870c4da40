"""Shared boarding pass samples."""

import pytest

from bcbp import Leg, BoardingPass

# One leg, mandatory items only.
ONE_LEG = "M1JOHN/SMITH JORDAN   EABCDEF JFKSVOSU 1234A001Y001Z0007 000"

# Four legs, no seat or sequence numbers.
FOUR_LEGS = (
    "M4VERYLONGESTLASTNAMEDE"
    "ABCDEF JFKSVOSU 1234 207          000"
    "ABCDEF SVOLEDSU 5678 210          000"
    "ABCDEF LEDSVOSU 9876 215          000"
    "ABCDEF SVOJFKSU 1357 215          000"
)

# Three legs with unique, repeated, and airline conditional data.
THREE_LEGS_CONDITIONAL = (
    "M3JOHN/SMITH          E"
    "ABCDEF JFKSVOSK 1234 123M014C0050 35D"
    ">5180O 0276BSK              "
    "2A55559467513980 SK                         "
    "*30600000K09         "
    "ABCDEF SVOFRASU 5678 135Y013A0012 337"
    "2A55559467513990 SU SU 12345678             "
    "09         "
    "ABCDEF FRAJFKSU 9876 231Y022F0052 337"
    "2A55559467513990 SU SU 12345678             "
    "09         "
)

@pytest.fixture
def one_leg_pass():
    return BoardingPass(
        passenger_last_name="JOHN",
        passenger_first_name="SMITH JORDAN",
        ticket_flag="E",
        legs=(
            Leg(
                pnr="ABCDEF",
                source_airport="JFK",
                destination_airport="SVO",
                airline_code="SU",
                flight_number="1234A",
                flight_day=1,
                compartment="Y",
                seat="1Z",
                sequence=7,
                passenger_status="0",
            ),
        ),
    )
