"""Decodes Bar-Coded Boarding Pass (BCBP) text."""

# Standard imports
import logging
import string

# Project imports
from bcbp.boarding_pass import BoardingPass, Leg
from bcbp.errors import BCBPError, ErrorKind
from bcbp.fields import (
    parse_numeric_or_zero, take_chain, take_fixed, trim_alpha
)

logger = logging.getLogger(__name__)

MIN_LENGTH = 60 # One leg with no conditional data
FORMAT_CODE = "M"
LEG_COUNT_DIGITS = "123456789"
UNIQUE_MARKERS = (">", "<")
UNIQUE_HEADER_LENGTH = 4 # Marker, version, and 2 character size
SECURITY_MARKER = "^"

# Mandatory repeated items, in order, with their widths.
LEG_FIELDS = (
    ('pnr', 7),
    ('source_airport', 3),
    ('destination_airport', 3),
    ('airline_code', 3),
    ('flight_number', 5),
    ('flight_day', 3),
    ('compartment', 1),
    ('seat', 4),
    ('sequence', 5),
    ('passenger_status', 1),
)

# Conditional unique items following the unique block header.
UNIQUE_FIELDS = (
    ('passenger_type', 1),
    ('checkin_source', 1),
    ('boardingpass_source', 1),
    ('boardingpass_issue_date', 4),
    ('document_type', 1),
    ('boardingpass_issuer_airline', 3),
    ('baggage_tag_numbers', 13),
)

# Conditional repeated items following the repeated block size.
REPEATED_FIELDS = (
    ('airline_numeric_code', 3),
    ('document_serial_number', 10),
    ('selectee_indicator', 1),
    ('document_verification', 1),
    ('marketing_carrier', 3),
    ('frequent_flyer_airline', 3),
    ('frequent_flyer_number', 16),
    ('id_ad_indicator', 1),
    ('free_baggage_allowance', 3),
    ('fast_track', 1),
)

def decode(bcbp_str: str) -> BoardingPass:
    """
    Decodes BCBP text into a BoardingPass.

    The text is upper-cased before parsing. Raises BCBPError at the
    first structural problem found; no partial pass is returned. Any
    text after the last leg is accepted, and security data found there
    is captured without being validated.
    """
    text = bcbp_str.upper()
    if len(text) < MIN_LENGTH:
        raise BCBPError(
            ErrorKind.DATA_LENGTH,
            f"BCBP text must be at least {MIN_LENGTH} characters, "
            f"got {len(text)}."
        )

    # Mandatory unique block
    format_code, text = take_fixed(text, 1)
    if format_code != FORMAT_CODE:
        raise BCBPError(
            ErrorKind.FORMAT_CODE,
            f"Format code must be {FORMAT_CODE!r}, got {format_code!r}."
        )
    leg_count_digit, text = take_fixed(text, 1)
    if leg_count_digit not in LEG_COUNT_DIGITS:
        raise BCBPError(
            ErrorKind.SEGMENTS_COUNT,
            f"Number of legs must be a digit from 1 to 9, "
            f"got {leg_count_digit!r}."
        )
    leg_count = int(leg_count_digit)
    name_field, text = take_fixed(text, 20)
    last_name, first_name = _split_name(name_field)
    ticket_flag, text = take_fixed(text, 1)
    logger.debug("Decoding %d leg(s)", leg_count)

    pass_items = {}
    legs = []
    for leg_index in range(leg_count):
        leg_items, text = _read_leg(text, leg_index, pass_items)
        legs.append(Leg(**leg_items))

    pass_items.update(_read_security(text))
    return BoardingPass(
        passenger_last_name=last_name,
        passenger_first_name=first_name,
        ticket_flag=trim_alpha(ticket_flag),
        legs=tuple(legs),
        **pass_items,
    )

def _split_name(name_field: str) -> tuple[str, str]:
    """
    Splits the name field into last and first names.

    The last name is the leading run of letters. A slash introduces the
    first name, which runs to the end of the field. Anything else
    besides trailing padding is an error.
    """
    index = 0
    while (index < len(name_field)
            and name_field[index] in string.ascii_uppercase):
        index += 1
    last_name, rest = name_field[:index], name_field[index:]
    if last_name == "":
        raise BCBPError(
            ErrorKind.NAME, f"Name field {name_field!r} has no last name."
        )
    first_name = ""
    if rest.startswith("/"):
        first_name = trim_alpha(rest[1:])
        rest = ""
    if rest.strip(" ") != "":
        raise BCBPError(
            ErrorKind.NAME,
            f"Unexpected {rest.strip()!r} in name field {name_field!r}."
        )
    return last_name, first_name

def _read_leg(text: str, leg_index: int, pass_items: dict
) -> tuple[dict, str]:
    """
    Reads one leg's mandatory items and conditional data.

    Returns a dict of Leg keyword arguments and the text following the
    leg. Unique conditional items found on the first leg are added to
    pass_items.
    """
    raw = {}
    for field_name, width in LEG_FIELDS:
        raw[field_name], text = take_fixed(text, width)
    size_field, text = take_fixed(text, 2)

    leg_items = {
        field_name: trim_alpha(value) for field_name, value in raw.items()
    }
    leg_items['flight_day'] = parse_numeric_or_zero(raw['flight_day'])
    leg_items['seat'] = raw['seat'].strip().lstrip("0")
    leg_items['sequence'] = parse_numeric_or_zero(raw['sequence'])

    conditional_size = parse_numeric_or_zero(size_field, 16)
    logger.debug("Leg %d conditional size %d", leg_index + 1,
        conditional_size)
    if conditional_size > len(text):
        raise BCBPError(
            ErrorKind.CONDITIONAL_DATA_SIZE,
            f"Leg {leg_index + 1} declares {conditional_size} characters "
            f"of conditional data but only {len(text)} remain."
        )
    block, text = text[:conditional_size], text[conditional_size:]
    if conditional_size == 0:
        return leg_items, text

    if leg_index == 0:
        unique_items, block = _read_unique(block)
        pass_items.update(unique_items)

    repeated_items, block = _read_repeated(block, leg_index)
    leg_items.update(repeated_items)
    if block != "":
        leg_items['airline_data'] = block
    return leg_items, text

def _read_unique(block: str) -> tuple[dict, str]:
    """Reads the conditional unique block at the start of the first leg."""
    if len(block) < UNIQUE_HEADER_LENGTH:
        raise BCBPError(
            ErrorKind.CONDITIONAL_DATA,
            "Conditional data is too short for a unique block header."
        )
    marker, version, size_field = block[0], block[1], block[2:4]
    if marker not in UNIQUE_MARKERS:
        raise BCBPError(
            ErrorKind.CONDITIONAL_DATA,
            f"Conditional data must start with '>' or '<', got {marker!r}."
        )
    size = parse_numeric_or_zero(size_field, 16)
    unique_stop = UNIQUE_HEADER_LENGTH + size
    if unique_stop > len(block):
        raise BCBPError(
            ErrorKind.CONDITIONAL_DATA_SIZE,
            f"Unique block declares {size} characters but only "
            f"{len(block) - UNIQUE_HEADER_LENGTH} remain."
        )
    logger.debug("Unique block version %s size %d", version, size)

    values = dict(zip(
        [field_name for field_name, _ in UNIQUE_FIELDS],
        take_chain(
            block[UNIQUE_HEADER_LENGTH:unique_stop],
            [width for _, width in UNIQUE_FIELDS],
        ),
    ))
    items = {
        'conditional_version': version,
        'conditional_data': block[:unique_stop],
    }
    for field_name, value in values.items():
        if field_name == 'boardingpass_issue_date':
            continue
        items[field_name] = trim_alpha(value)
    issue_date = values['boardingpass_issue_date']
    if issue_date is not None:
        items['boardingpass_issue_year_digit'] = parse_numeric_or_zero(
            issue_date[0])
        items['boardingpass_issue_day'] = parse_numeric_or_zero(
            issue_date[1:])
    return items, block[unique_stop:]

def _read_repeated(block: str, leg_index: int) -> tuple[dict, str]:
    """Reads a leg's conditional repeated block."""
    if len(block) < 2:
        raise BCBPError(
            ErrorKind.CONDITIONAL_DATA,
            f"Leg {leg_index + 1} conditional data is too short for a "
            "repeated block size."
        )
    size = parse_numeric_or_zero(block[:2], 16)
    repeated_stop = 2 + size
    if repeated_stop > len(block):
        raise BCBPError(
            ErrorKind.CONDITIONAL_DATA_SIZE,
            f"Leg {leg_index + 1} repeated block declares {size} "
            f"characters but only {len(block) - 2} remain."
        )
    logger.debug("Leg %d repeated block size %d", leg_index + 1, size)
    values = take_chain(
        block[2:repeated_stop], [width for _, width in REPEATED_FIELDS]
    )
    items = {
        field_name: trim_alpha(value)
        for (field_name, _), value in zip(REPEATED_FIELDS, values)
    }
    return items, block[repeated_stop:]

def _read_security(text: str) -> dict:
    """Captures the security block, if any, from text after the legs."""
    if not text.startswith(SECURITY_MARKER) or len(text) < 2:
        if text != "":
            logger.debug("Ignoring %d trailing character(s)", len(text))
        return {}
    items = {'security_data_type': text[1]}
    size = parse_numeric_or_zero(text[2:4], 16)
    items['security_data'] = text[4:4 + size]
    logger.debug("Security block type %s size %d", text[1], size)
    return items
