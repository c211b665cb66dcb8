from enum import StrEnum


class ScanState(StrEnum):
    SCANNING = 'scanning'
    DECODED = 'decoded'
    VALID = 'valid'
    INVALID = 'invalid'


TERMINAL_SCAN_STATES = frozenset({ScanState.VALID, ScanState.INVALID})
