# Shared constants for the migration address format

import os

# --- Tryte alphabet ---
# "9" is zero, "A".."M" are 1..13 and "N".."Z" are -13..-1.
TRYTE_ALPHABET = "9ABCDEFGHIJKLMNOPQRSTUVWXYZ"
TRITS_PER_TRYTE = 3

# --- Migration address layout ---
MIGRATION_PREFIX = "TRANSFER"
MIGRATION_PADDING = "9"
ADDRESS_TRYTES = 81
CHECKSUM_TRYTES = 9
ADDRESS_WITH_CHECKSUM_TRYTES = ADDRESS_TRYTES + CHECKSUM_TRYTES

# Payload occupies trytes 8..79, i.e. trits 24..240 of the 243-trit address.
PAYLOAD_TRIT_START = 24
PAYLOAD_TRIT_END = 240
PAYLOAD_DIGEST_BYTES = 4

# --- Modern (Chrysalis) addresses ---
ED25519_ADDRESS_TYPE = 0
ED25519_ADDRESS_LENGTH = 32
DEFAULT_HRP = "iota"

EXPLORER_URL = "https://explorer.iota.org/mainnet/address/"


# These are read at call time so tests can monkeypatch the environment.
def get_hrp() -> str:
    return os.getenv("MIGADDR_HRP", DEFAULT_HRP)


def get_explorer_url() -> str:
    return os.getenv("MIGADDR_EXPLORER_URL", EXPLORER_URL)
