"""File-backed array of fixed-size account slots."""

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path

from account_store.codec import RECORD_SIZE, decode, decode_slot, empty_sentinel, encode
from account_store.exceptions import (
    InvalidPositionError,
    ShortReadError,
    ShortWriteError,
    StorageIOError,
)
from account_store.models import MAX_ACCOUNTS, Account, Slot

logger = logging.getLogger(__name__)

# Open modes accepted by ``PositionalRecordStore.open``
OPEN_MODES = {
    "r": "rb",
    "rw": "r+b",
}


@dataclass
class IntegrityReport:
    """Result of scanning every slot of a data file."""

    file_size: int
    expected_size: int
    occupied: list[int] = field(default_factory=list)
    empty: list[int] = field(default_factory=list)
    damaged: list[int] = field(default_factory=list)
    misplaced: list[int] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.file_size == self.expected_size and not self.damaged and not self.misplaced


class PositionalRecordStore:
    """Fixed number of ``RECORD_SIZE`` slots in a single file.

    Slot ``position`` lives at byte offset ``position * RECORD_SIZE``. The
    file is written once by ``initialize`` and never grows or shrinks.

    Parameters
    ----------
    path : str | Path
        Backing data file.
    capacity : int
        Number of slots (default ``MAX_ACCOUNTS``).
    """

    def __init__(self, path: str | Path, capacity: int = MAX_ACCOUNTS) -> None:
        self.path = Path(path)
        self.capacity = capacity
        self._file = None

    @property
    def expected_size(self) -> int:
        return self.capacity * RECORD_SIZE

    @property
    def is_open(self) -> bool:
        return self._file is not None

    def initialize(self) -> None:
        """Create or truncate the data file and fill it with empty slots."""
        block = encode(empty_sentinel())
        try:
            with open(self.path, "wb") as f:
                for _ in range(self.capacity):
                    f.write(block)
        except OSError as e:
            raise StorageIOError(f"Could not create data file {self.path}: {e}") from e
        logger.info(
            "Initialized %s with %d empty slots",
            self.path,
            self.capacity,
            extra={"path": self.path},
        )

    def initialize_if_needed(self) -> bool:
        """Initialize the data file only if it does not exist yet.

        Returns
        -------
        bool
            True when a new file was created.
        """
        if self.path.exists():
            logger.debug("Data file %s found", self.path)
            return False
        self.initialize()
        return True

    @contextmanager
    def open(self, mode: str = "r") -> Iterator["PositionalRecordStore"]:
        """Hold the data file open for the duration of a ``with`` block.

        Parameters
        ----------
        mode : str
            ``"r"`` for read-only or ``"rw"`` for read-write.
        """
        if mode not in OPEN_MODES:
            raise ValueError(f"Unknown mode {mode!r}, expected one of {sorted(OPEN_MODES)}")
        if self._file is not None:
            raise StorageIOError(f"Data file {self.path} is already open")

        try:
            self._file = open(self.path, OPEN_MODES[mode])
        except FileNotFoundError as e:
            raise StorageIOError(f"Data file {self.path} does not exist") from e
        except OSError as e:
            raise StorageIOError(f"Could not open {self.path} in mode {mode!r}: {e}") from e

        try:
            yield self
        finally:
            self.close()

    def close(self) -> None:
        """Release the file handle. Safe to call when already closed."""
        if self._file is None:
            return
        f, self._file = self._file, None
        try:
            f.close()
        except OSError as e:
            raise StorageIOError(f"Failed to close {self.path}: {e}") from e

    def read_at(self, position: int) -> Account:
        """Read and decode the record at ``position``.

        Raises
        ------
        InvalidPositionError
            If ``position`` is outside ``[0, capacity)``.
        ShortReadError
            If the file ends before a full record; ``record`` on the error is
            the empty sentinel.
        """
        f = self._handle(position)
        try:
            f.seek(position * RECORD_SIZE)
            data = f.read(RECORD_SIZE)
        except OSError as e:
            raise StorageIOError(f"Could not read position {position}: {e}") from e

        if len(data) != RECORD_SIZE:
            raise ShortReadError(
                f"Short read at position {position}: {len(data)} of {RECORD_SIZE} bytes",
                position=position,
                record=empty_sentinel(),
            )
        logger.debug("Read position %d", position, extra={"position": position})
        return decode(data)

    def read_slot(self, position: int) -> Slot:
        """Read ``position`` as a tagged slot."""
        account = self.read_at(position)
        return Slot(position=position, account=None if account.is_empty else account)

    def write_at(self, position: int, account: Account) -> None:
        """Overwrite the whole slot at ``position``.

        A partial write raises ``ShortWriteError`` and is not rolled back.
        """
        f = self._handle(position)
        data = encode(account)
        try:
            f.seek(position * RECORD_SIZE)
            written = f.write(data)
            f.flush()
        except OSError as e:
            raise StorageIOError(f"Could not write position {position}: {e}") from e

        if written != RECORD_SIZE:
            raise ShortWriteError(
                f"Short write at position {position}: {written} of {RECORD_SIZE} bytes",
                position=position,
            )
        logger.debug("Wrote position %d", position, extra={"position": position})

    def scan(self) -> Iterator[Slot]:
        """Yield every slot in ascending position order, empty ones included."""
        for position in range(self.capacity):
            yield self.read_slot(position)

    def audit(self) -> IntegrityReport:
        """Check file size and every slot without stopping at damage."""
        f = self._require_open()
        report = IntegrityReport(
            file_size=os.fstat(f.fileno()).st_size,
            expected_size=self.expected_size,
        )

        for position in range(self.capacity):
            try:
                f.seek(position * RECORD_SIZE)
                data = f.read(RECORD_SIZE)
            except OSError as e:
                raise StorageIOError(f"Could not read position {position}: {e}") from e
            if len(data) != RECORD_SIZE:
                report.damaged.append(position)
                continue
            slot = decode_slot(position, data)
            if not slot.occupied:
                report.empty.append(position)
            elif slot.account.position != position:
                report.misplaced.append(position)
            else:
                report.occupied.append(position)

        if not report.ok:
            logger.warning(
                "Integrity problems in %s: size %d/%d, %d damaged, %d misplaced",
                self.path,
                report.file_size,
                report.expected_size,
                len(report.damaged),
                len(report.misplaced),
            )
        return report

    def _handle(self, position: int):
        if not 0 <= position < self.capacity:
            raise InvalidPositionError(position, self.capacity)
        return self._require_open()

    def _require_open(self):
        if self._file is None:
            raise StorageIOError(f"Data file {self.path} is not open")
        return self._file
