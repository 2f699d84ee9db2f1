"""
Event Logger Module

Records hash operations in a tamper-evident audit chain.

Features:
- One event per hash call (success or rejected input)
- Self-check results
- Each entry links to the previous one through the bit-level SHA-256
- JSON export/import with full chain re-validation

The engine itself never logs; callers opt in by hashing through an
EventLogger instance.

Author: bitsha Project
"""

import json
import time
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Sequence

from ..core_crypto.bit_order import BitOrder
from ..core_crypto.errors import InvalidLength
from ..core_crypto.padding import BLOCK_SIZE_BITS, padded_length
from ..core_crypto.reference import self_check
from ..core_crypto.sha256 import sha256_bits, sha256_standard
from ..encoding.bits import bits_to_hex, bytes_to_bits


# ============================================================================
# Constants
# ============================================================================

EVENT_VERSION = "1.0"
GENESIS_LINK = "00" * 32  # 32 zero bytes before the first entry


# ============================================================================
# Event Types
# ============================================================================

class EventType(Enum):
    """Types of hash events that can be logged."""

    HASH_COMPUTED = "hash_computed"
    INVALID_INPUT = "invalid_input"
    SELF_CHECK = "self_check"


# ============================================================================
# Event Structure
# ============================================================================

@dataclass
class HashEvent:
    """
    A single logged hash operation.

    Only lengths and the digest are stored, never the input bits.
    """
    event_type: EventType
    timestamp: int  # Unix timestamp
    order: Optional[BitOrder] = None
    bit_length: int = 0
    block_count: int = 0
    digest_hex: Optional[str] = None
    details: Dict[str, Any] = field(default_factory=dict)

    def to_record(self) -> str:
        """Serialize the event as compact JSON."""
        return json.dumps({
            'version': EVENT_VERSION,
            'type': self.event_type.value,
            'time': self.timestamp,
            'order': self.order.value if self.order else None,
            'bits': self.bit_length,
            'blocks': self.block_count,
            'digest': self.digest_hex,
            'details': self.details,
        }, separators=(',', ':'), sort_keys=True)

    @classmethod
    def from_record(cls, record: str) -> 'HashEvent':
        """Parse an event from its JSON record."""
        data = json.loads(record)
        return cls(
            event_type=EventType(data['type']),
            timestamp=data['time'],
            order=BitOrder(data['order']) if data.get('order') else None,
            bit_length=data.get('bits', 0),
            block_count=data.get('blocks', 0),
            digest_hex=data.get('digest'),
            details=data.get('details', {}),
        )

    def __str__(self) -> str:
        dt = datetime.fromtimestamp(self.timestamp)
        order = self.order.value if self.order else '-'
        digest = f"{self.digest_hex[:16]}..." if self.digest_hex else '-'
        return (
            f"[{dt.strftime('%Y-%m-%d %H:%M:%S')}] "
            f"{self.event_type.value} | "
            f"order:{order} bits:{self.bit_length} digest:{digest}"
        )


@dataclass(frozen=True)
class AuditEntry:
    """Immutable link in the audit chain."""
    index: int
    prev_link: str
    record: str
    link: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'index': self.index,
            'prev_link': self.prev_link,
            'record': self.record,
            'link': self.link,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AuditEntry':
        return cls(
            index=data['index'],
            prev_link=data['prev_link'],
            record=data['record'],
            link=data['link'],
        )


class ValidationError(Exception):
    """Raised when audit chain validation fails."""
    pass


def compute_link(prev_link: str, record: str) -> str:
    """
    Chain a record onto the previous link.

    link = SHA-256(prev_link_bytes || record_utf8), computed by the bit engine.
    """
    payload = bytes.fromhex(prev_link) + record.encode('utf-8')
    digest = sha256_standard(bytes_to_bits(payload, BitOrder.MSB_FIRST))
    return bits_to_hex(digest, BitOrder.MSB_FIRST)


# ============================================================================
# Event Logger
# ============================================================================

class EventLogger:
    """
    Hash-chained audit logger for bit-level SHA-256 operations.

    Not thread-safe; use one instance per thread or guard it externally.
    """

    def __init__(self, entries: Optional[Sequence[AuditEntry]] = None):
        """
        Initialize the event logger.

        Args:
            entries: Optional existing chain to continue (validated first)
        """
        self._entries: List[AuditEntry] = list(entries or [])
        self._callbacks: List[Callable[[HashEvent], None]] = []
        if self._entries:
            self.validate_chain()

    @property
    def entries(self) -> List[AuditEntry]:
        """Get the audit chain (read-only view)."""
        return list(self._entries)

    @property
    def last_link(self) -> str:
        """Link of the newest entry, or the genesis link."""
        return self._entries[-1].link if self._entries else GENESIS_LINK

    def _add_event(self, event: HashEvent) -> AuditEntry:
        """Append an event to the chain and notify callbacks."""
        record = event.to_record()
        prev_link = self.last_link
        entry = AuditEntry(
            index=len(self._entries),
            prev_link=prev_link,
            record=record,
            link=compute_link(prev_link, record),
        )
        self._entries.append(entry)

        for callback in self._callbacks:
            callback(event)

        return entry

    def add_callback(self, callback: Callable[[HashEvent], None]) -> None:
        """Add a callback to be notified of new events."""
        self._callbacks.append(callback)

    def remove_callback(self, callback: Callable[[HashEvent], None]) -> None:
        """Remove a callback."""
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    # ========================================================================
    # Hashing
    # ========================================================================

    def hash_bits(
        self,
        bits: Sequence[bool],
        order: BitOrder = BitOrder.LSB_FIRST
    ) -> List[bool]:
        """
        Hash `bits` and record the outcome.

        Args:
            bits: Input bits (length must be a multiple of 8)
            order: Within-byte bit order of input and digest

        Returns:
            The 256-bit digest

        Raises:
            InvalidLength: Re-raised after an INVALID_INPUT event is logged
        """
        try:
            digest = sha256_bits(bits, order)
        except InvalidLength as exc:
            self._add_event(HashEvent(
                event_type=EventType.INVALID_INPUT,
                timestamp=int(time.time()),
                order=order,
                bit_length=exc.length,
                details={'error': str(exc)},
            ))
            raise

        self._add_event(HashEvent(
            event_type=EventType.HASH_COMPUTED,
            timestamp=int(time.time()),
            order=order,
            bit_length=len(bits),
            block_count=padded_length(len(bits)) // BLOCK_SIZE_BITS,
            digest_hex=bits_to_hex(digest, order),
        ))
        return digest

    def run_self_check(self) -> bool:
        """Run the reference self-check and record the result."""
        passed = self_check()
        self._add_event(HashEvent(
            event_type=EventType.SELF_CHECK,
            timestamp=int(time.time()),
            details={'passed': passed},
        ))
        return passed

    # ========================================================================
    # Retrieval and Validation
    # ========================================================================

    def get_all_events(self) -> List[HashEvent]:
        """Decode every event in the chain, oldest first."""
        return [HashEvent.from_record(entry.record) for entry in self._entries]

    def get_events_by_type(self, event_type: EventType) -> List[HashEvent]:
        """Get all events of a specific type."""
        return [e for e in self.get_all_events() if e.event_type == event_type]

    def validate_chain(self) -> bool:
        """
        Validate the entire audit chain.

        Returns:
            True if chain is valid

        Raises:
            ValidationError: If any entry is out of place or altered
        """
        prev_link = GENESIS_LINK
        for position, entry in enumerate(self._entries):
            if entry.index != position:
                raise ValidationError(
                    f"Invalid index: expected {position}, got {entry.index}"
                )
            if entry.prev_link != prev_link:
                raise ValidationError(f"Previous link mismatch at entry {position}")
            if compute_link(entry.prev_link, entry.record) != entry.link:
                raise ValidationError(f"Link mismatch at entry {position}")
            prev_link = entry.link
        return True

    def verify_integrity(self) -> bool:
        """Verify the integrity of the audit log."""
        try:
            return self.validate_chain()
        except ValidationError:
            return False

    def export_log(self) -> str:
        """Export the audit chain as JSON."""
        return json.dumps([entry.to_dict() for entry in self._entries], indent=2)

    @classmethod
    def import_log(cls, json_str: str) -> 'EventLogger':
        """
        Import an audit chain from JSON.

        Raises:
            ValidationError: If the JSON is malformed or the chain does not verify
        """
        try:
            entries = [AuditEntry.from_dict(item) for item in json.loads(json_str)]
            return cls(entries=entries)
        except (json.JSONDecodeError, KeyError, TypeError, AttributeError) as exc:
            # AttributeError: a record that is not a string
            raise ValidationError(f"Malformed audit log: {exc}") from exc

    def print_audit_log(self, last_n: Optional[int] = None) -> None:
        """Print the audit log in a readable format."""
        events = self.get_all_events()
        if last_n:
            events = events[-last_n:]

        print("\n" + "=" * 70)
        print("HASH AUDIT LOG")
        print("=" * 70)

        for event in events:
            print(event)
            for k, v in event.details.items():
                print(f"    {k}: {v}")

        print("=" * 70)
        print(f"Total events: {len(self._entries)}")
        print(f"Head link: {self.last_link[:16]}...")
        print("=" * 70)


# ============================================================================
# Convenience Functions
# ============================================================================

def create_event_logger() -> EventLogger:
    """Create a new, empty event logger."""
    return EventLogger()
