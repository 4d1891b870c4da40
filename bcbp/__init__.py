"""Reads and writes IATA Bar-Coded Boarding Pass (BCBP) text."""

# Project imports
from bcbp.boarding_pass import BoardingPass, Leg
from bcbp.decoder import decode
from bcbp.encoder import encode
from bcbp.errors import BCBPError, ErrorKind

__all__ = [
    "BCBPError",
    "BoardingPass",
    "ErrorKind",
    "Leg",
    "decode",
    "encode",
]
