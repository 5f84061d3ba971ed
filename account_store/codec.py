"""Fixed-width binary encoding of account records.

Layout (little-endian, 40 bytes)::

    offset  width  field
    0       4      account_number  unsigned int, 0 = empty slot
    4       15     last_name       ASCII, null padded, 14 significant chars
    19      10     first_name      ASCII, null padded, 9 significant chars
    29      3      padding         zero
    32      8      balance         float64

The padding reproduces the natural alignment of the balance field so files
written by C tooling that stores the same struct on x86-64 remain readable.
"""

import struct

from account_store.models import FIRST_NAME_LENGTH, LAST_NAME_LENGTH, Account, BoundedText, Slot

LAST_NAME_WIDTH = LAST_NAME_LENGTH + 1
FIRST_NAME_WIDTH = FIRST_NAME_LENGTH + 1

RECORD_FORMAT = struct.Struct(f"<I{LAST_NAME_WIDTH}s{FIRST_NAME_WIDTH}s3xd")
RECORD_SIZE = RECORD_FORMAT.size

_TEXT_ENCODING = "ascii"


def empty_sentinel() -> Account:
    """Return the record stored in unoccupied slots."""
    return Account.empty()


def encode(account: Account) -> bytes:
    """Encode an account into exactly ``RECORD_SIZE`` bytes.

    Names longer than their field are cut to the field width minus one,
    leaving room for the terminating null byte.
    """
    last = BoundedText.fit(account.last_name, LAST_NAME_LENGTH)
    first = BoundedText.fit(account.first_name, FIRST_NAME_LENGTH)
    return RECORD_FORMAT.pack(
        account.account_number,
        _encode_text(last),
        _encode_text(first),
        float(account.balance),
    )


def decode(data: bytes) -> Account:
    """Decode a ``RECORD_SIZE`` byte block.

    A zero account number decodes to the empty sentinel whatever the other
    bytes contain.
    """
    if len(data) != RECORD_SIZE:
        raise ValueError(f"Expected {RECORD_SIZE} bytes, got {len(data)}")

    account_number, last_raw, first_raw, balance = RECORD_FORMAT.unpack(data)
    if account_number == 0:
        return empty_sentinel()

    return Account(
        account_number=account_number,
        last_name=_decode_text(last_raw),
        first_name=_decode_text(first_raw),
        balance=balance,
    )


def decode_slot(position: int, data: bytes) -> Slot:
    """Decode a block into a tagged slot."""
    account = decode(data)
    return Slot(position=position, account=None if account.is_empty else account)


def _encode_text(text: BoundedText) -> bytes:
    # struct pads with nulls up to the field width
    return text.value.encode(_TEXT_ENCODING, errors="replace")


def _decode_text(raw: bytes) -> str:
    return raw.split(b"\x00", 1)[0].decode(_TEXT_ENCODING, errors="replace")
