"""Data model for Bar-Coded Boarding Passes."""

# Standard imports
from dataclasses import dataclass, field
from datetime import date, datetime, timezone

# Third-party imports
from dateutil.relativedelta import relativedelta

# Project imports
from bcbp.fields import pad_numeric

MAX_LEGS = 9
NAME_LENGTH = 20

@dataclass(frozen=True)
class Leg():
    """
    Represents one flight leg of a boarding pass.

    Text fields are stored without their wire padding. Numeric fields
    use 0 for a blank value, and seat uses an empty string.
    """
    pnr: str = ""
    source_airport: str = ""
    destination_airport: str = ""
    airline_code: str = ""
    flight_number: str = ""
    flight_day: int = 0
    compartment: str = ""
    seat: str = ""
    sequence: int = 0
    passenger_status: str = ""

    # Repeated conditional items. None means the item was not present.
    airline_numeric_code: str | None = None
    document_serial_number: str | None = None
    selectee_indicator: str | None = None
    document_verification: str | None = None
    marketing_carrier: str | None = None
    frequent_flyer_airline: str | None = None
    frequent_flyer_number: str | None = None
    id_ad_indicator: str | None = None
    free_baggage_allowance: str | None = None
    fast_track: str | None = None
    airline_data: str | None = None

    def __str__(self):
        return (
            f"{self.flight_day_aligned or '---'} {self.airline_code} "
            f"{self.flight_number} "
            f"{self.source_airport} → {self.destination_airport}"
        )

    @property
    def flight_day_aligned(self) -> str:
        """Flight day as it appears in BCBP text, or '' if unset."""
        return pad_numeric(self.flight_day, 3)

    @property
    def seat_aligned(self) -> str:
        """Seat as it appears in BCBP text, or '' if unset."""
        if self.seat == "":
            return ""
        return self.seat.rjust(4, "0")

    @property
    def sequence_aligned(self) -> str:
        """Check-in sequence number zero-padded to 4 digits, or ''."""
        return pad_numeric(self.sequence, 4)

    def flight_date(self, year: int) -> date:
        """
        Converts the flight day of year into a date in the given year.

        A missing (0) or out of range (366 and above) flight day is
        treated as January 1.
        """
        day_of_year = self.flight_day
        if day_of_year < 1 or day_of_year >= 366:
            day_of_year = 1
        return date(year, 1, 1) + relativedelta(yearday=day_of_year)

    def flight_date_current_year(self) -> date:
        """Converts the flight day of year into a date this (UTC) year."""
        return self.flight_date(datetime.now(timezone.utc).year)

    def mandatory(self) -> "Leg":
        """Returns a copy of this leg without any conditional items."""
        return Leg(
            pnr=self.pnr,
            source_airport=self.source_airport,
            destination_airport=self.destination_airport,
            airline_code=self.airline_code,
            flight_number=self.flight_number,
            flight_day=self.flight_day,
            compartment=self.compartment,
            seat=self.seat,
            sequence=self.sequence,
            passenger_status=self.passenger_status,
        )


@dataclass(frozen=True)
class BoardingPass():
    """
    Represents a Bar-Coded Boarding Pass (BCBP).

    Instances are immutable. Use bcbp.decode() to read BCBP text and
    bcbp.encode() to write the mandatory items back out. Conditional
    and security items are kept when decoding but are never encoded.
    """
    passenger_last_name: str = ""
    passenger_first_name: str = ""
    ticket_flag: str = ""
    legs: tuple[Leg, ...] = field(default_factory=tuple)

    # Unique conditional items (first leg only).
    conditional_version: str | None = None
    conditional_data: str | None = None
    passenger_type: str | None = None
    checkin_source: str | None = None
    boardingpass_source: str | None = None
    boardingpass_issue_year_digit: int | None = None
    boardingpass_issue_day: int | None = None
    document_type: str | None = None
    boardingpass_issuer_airline: str | None = None
    baggage_tag_numbers: str | None = None

    # Security items. Captured as-is; the signature is not verified.
    security_data_type: str | None = None
    security_data: str | None = None

    def __post_init__(self):
        # Accept any sequence of legs, but always store a tuple.
        if not isinstance(self.legs, tuple):
            object.__setattr__(self, 'legs', tuple(self.legs))

    def __str__(self):
        return f"{self.name} ({len(self.legs)} legs)"

    @property
    def name(self) -> str:
        """Passenger name as it fits in the 20 character name field."""
        if self.passenger_first_name:
            full_name = f"{self.passenger_last_name}/{self.passenger_first_name}"
        else:
            full_name = self.passenger_last_name
        return full_name[:NAME_LENGTH]

    @property
    def leg_count(self) -> int:
        """Number of legs on the pass."""
        return len(self.legs)

    @property
    def electronic_ticket(self) -> bool:
        """Whether the pass is for an electronic ticket."""
        return self.ticket_flag == "E"

    def mandatory(self) -> "BoardingPass":
        """Returns a copy with only the items that encode() writes."""
        return BoardingPass(
            passenger_last_name=self.passenger_last_name,
            passenger_first_name=self.passenger_first_name,
            ticket_flag=self.ticket_flag,
            legs=tuple(leg.mandatory() for leg in self.legs),
        )
