"""Encodes boarding passes as Bar-Coded Boarding Pass (BCBP) text."""

# Project imports
from bcbp.boarding_pass import MAX_LEGS, NAME_LENGTH, BoardingPass, Leg
from bcbp.errors import BCBPError, ErrorKind
from bcbp.fields import fit

def encode(boarding_pass: BoardingPass) -> str:
    """
    Encodes the mandatory items of a boarding pass as BCBP text.

    Conditional and security items are not written, so every leg gets a
    conditional size of 00. Values longer than their field are clipped.
    Raises BCBPError if the pass has no legs or more legs than the
    format allows.
    """
    leg_count = len(boarding_pass.legs)
    if leg_count < 1 or leg_count > MAX_LEGS:
        raise BCBPError(
            ErrorKind.SEGMENTS_COUNT,
            f"A boarding pass must have 1 to {MAX_LEGS} legs, "
            f"got {leg_count}."
        )
    parts = [
        "M",
        str(leg_count),
        fit(boarding_pass.name, NAME_LENGTH),
        fit(boarding_pass.ticket_flag, 1),
    ]
    parts.extend(_encode_leg(leg) for leg in boarding_pass.legs)
    return "".join(parts)

def _encode_leg(leg: Leg) -> str:
    """Encodes the mandatory repeated items of one leg."""
    return "".join([
        fit(leg.pnr, 7),
        fit(leg.source_airport, 3),
        fit(leg.destination_airport, 3),
        fit(leg.airline_code, 3),
        fit(leg.flight_number, 5),
        fit(leg.flight_day_aligned, 3),
        fit(leg.compartment, 1),
        fit(leg.seat_aligned, 4, right=True),
        fit(leg.sequence_aligned, 5),
        fit(leg.passenger_status, 1),
        "00",
    ])
