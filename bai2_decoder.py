"""
bai2_decoder.py
Variable-length decoding of BAI2 amount and transaction detail fields.

The number of fields an amount or a 16 record occupies depends on its funds
type, so decoding walks the merged field list with a cursor: every decode
step returns the value together with the number of fields it consumed.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Dict, List, Optional, Tuple

from bai2_codes import AmountKind, Direction, classify_amount_code, classify_transaction_code
from bai2_errors import FieldCountError, FieldDecodeError
from bai2_fields import TimeValue, get_field, parse_date, parse_int, parse_string, parse_time
from bai2_scanner import Node

logger = logging.getLogger(__name__)

TRANSACTION_MIN_FIELDS = 3   # record code, type code, amount


class FundsType(str, Enum):
    IMMEDIATE_AVAILABILITY = "immediate_availability"
    ONE_DAY_AVAILABILITY = "one_day_availability"
    TWO_OR_MORE_DAYS_AVAILABILITY = "two_or_more_days_availability"
    VALUE_DATED = "value_dated"
    DISTRIBUTED_AVAILABILITY_S = "distributed_availability_s"
    DISTRIBUTED_AVAILABILITY_D = "distributed_availability_d"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: str) -> "FundsType":
        return _FUNDS_TYPES.get(parse_string(value), cls.UNKNOWN)


_FUNDS_TYPES = {
    "0": FundsType.IMMEDIATE_AVAILABILITY,
    "1": FundsType.ONE_DAY_AVAILABILITY,
    "2": FundsType.TWO_OR_MORE_DAYS_AVAILABILITY,
    "V": FundsType.VALUE_DATED,
    "S": FundsType.DISTRIBUTED_AVAILABILITY_S,
    "D": FundsType.DISTRIBUTED_AVAILABILITY_D,
}


# ---------------------------------------------------------------------------
# Data Classes
# ---------------------------------------------------------------------------
@dataclass
class FundsDetail:
    funds_type: FundsType = FundsType.UNKNOWN
    value_date: Optional[date] = None
    value_time: Optional[TimeValue] = None
    # days (or S bucket index 0/1/2) -> amount
    availability: Dict[int, int] = field(default_factory=dict)


@dataclass
class Amount:
    type_code: str = ""
    kind: AmountKind = AmountKind.UNKNOWN
    category: str = ""
    amount: Optional[int] = None
    item_count: Optional[int] = None
    funds_type: FundsType = FundsType.UNKNOWN
    availability: Dict[int, int] = field(default_factory=dict)
    value_date: Optional[date] = None
    value_time: Optional[TimeValue] = None


@dataclass
class TransactionRecord:
    type_code: str = ""
    direction: Direction = Direction.UNKNOWN
    category: str = ""
    amount: Optional[int] = None
    funds_type: FundsType = FundsType.UNKNOWN
    availability: Dict[int, int] = field(default_factory=dict)
    value_date: Optional[date] = None
    value_time: Optional[TimeValue] = None
    bank_reference_number: str = ""
    customer_reference_number: str = ""
    text: List[str] = field(default_factory=list)

    @property
    def is_credit(self) -> bool:
        return self.direction == Direction.CREDIT


# ---------------------------------------------------------------------------
# Funds type
# ---------------------------------------------------------------------------
def decode_availability(
    funds_type: FundsType, fields: List[str], start: int, record: str = "amount"
) -> Tuple[FundsDetail, int]:
    """
    Decode the fields that follow a funds type discriminant.
    Returns the detail and the number of extra fields consumed:
    V -> 2, S -> 3, D -> 1 + 2 * count, everything else -> 0.
    """
    detail = FundsDetail(funds_type=funds_type)

    if funds_type == FundsType.VALUE_DATED:
        detail.value_date = parse_date(get_field(fields, start))
        detail.value_time = parse_time(get_field(fields, start + 1))
        return detail, 2

    if funds_type == FundsType.DISTRIBUTED_AVAILABILITY_S:
        for bucket in range(3):
            raw = get_field(fields, start + bucket)
            value = parse_int(raw)
            if value is None:
                raise FieldDecodeError(record, f"availability bucket {bucket}", raw)
            detail.availability[bucket] = value
        return detail, 3

    if funds_type == FundsType.DISTRIBUTED_AVAILABILITY_D:
        count = parse_int(get_field(fields, start)) or 0
        if count < 0:
            count = 0
        cursor = start + 1
        # pairs past the end of the record are never read
        present = max(0, (len(fields) - cursor) // 2)
        for _ in range(min(count, present)):
            days = parse_int(get_field(fields, cursor))
            value = parse_int(get_field(fields, cursor + 1))
            if days is not None and value is not None:
                detail.availability[days] = value
            else:
                logger.debug(f"dropping unparseable availability pair at field {cursor}")
            cursor += 2
        return detail, 1 + 2 * count

    return detail, 0


def decode_funds(fields: List[str], start: int, record: str = "amount") -> Tuple[FundsDetail, int]:
    """Decode a funds type field plus its extras; consumed includes the discriminant."""
    funds_type = FundsType.parse(get_field(fields, start))
    detail, extra = decode_availability(funds_type, fields, start + 1, record)
    return detail, 1 + extra


# ---------------------------------------------------------------------------
# Account-level amounts (03 record)
# ---------------------------------------------------------------------------
def decode_amount(fields: List[str], start: int) -> Tuple[Amount, int]:
    """Decode one type code / amount / item count / funds type group."""
    type_code = parse_string(get_field(fields, start))
    kind, category = classify_amount_code(type_code)
    funds, consumed = decode_funds(fields, start + 3)

    amount = Amount(
        type_code=type_code,
        kind=kind,
        category=category,
        amount=parse_int(get_field(fields, start + 1)),
        item_count=parse_int(get_field(fields, start + 2)),
        funds_type=funds.funds_type,
        availability=funds.availability,
        value_date=funds.value_date,
        value_time=funds.value_time,
    )
    return amount, 3 + consumed


def decode_amounts(fields: List[str]) -> List[Amount]:
    """Decode back-to-back amounts until fewer than 2 fields remain."""
    amounts = []
    cursor = 0
    while len(fields) - cursor >= 2:
        amount, consumed = decode_amount(fields, cursor)
        cursor += consumed
        # Skip empty type_codes
        if amount.type_code:
            amounts.append(amount)
    return amounts


# ---------------------------------------------------------------------------
# Transaction detail (16 record)
# ---------------------------------------------------------------------------
def decode_transaction(node: Node) -> TransactionRecord:
    fields = node.fields()
    if len(fields) < TRANSACTION_MIN_FIELDS:
        raise FieldCountError("transaction detail", TRANSACTION_MIN_FIELDS, len(fields))

    type_code = parse_string(fields[1])
    direction, category = classify_transaction_code(type_code)

    funds, consumed = decode_funds(fields, 3, record="transaction detail")
    cursor = 3 + consumed

    bank_ref = get_field(fields, cursor)
    customer_ref = get_field(fields, cursor + 1)
    cursor += 2

    text = [parse_string(value) for value in fields[cursor:]]
    # a bare "/" terminator after the last text field is not text
    if text and not text[-1] and fields[-1].strip() == "/":
        text.pop()

    return TransactionRecord(
        type_code=type_code,
        direction=direction,
        category=category,
        amount=parse_int(fields[2]),
        funds_type=funds.funds_type,
        availability=funds.availability,
        value_date=funds.value_date,
        value_time=funds.value_time,
        bank_reference_number=parse_string(bank_ref),
        customer_reference_number=parse_string(customer_ref),
        text=text,
    )
