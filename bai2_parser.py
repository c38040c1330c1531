"""
bai2_parser.py
Full-fidelity BAI2 file parser.
Scans all record types (01, 02, 03, 16, 49, 88, 98, 99) into a validated
record tree, decodes every level into typed records, and exports the result
as JSON-ready dicts or flat rows / DataFrames for CSV output.
"""

import json
import logging
from dataclasses import asdict, dataclass, field
from datetime import date, time
from enum import Enum
from typing import List, Optional

import pandas as pd

from bai2_codes import AsOfDateModifier, Direction, GroupStatus
from bai2_decoder import Amount, TransactionRecord, decode_amounts, decode_transaction
from bai2_errors import ControlTotalError, FieldCountError
from bai2_fields import (
    TimeValue,
    format_time,
    get_field,
    parse_currency,
    parse_date,
    parse_int,
    parse_string,
    parse_time,
)
from bai2_scanner import Node, scan

logger = logging.getLogger(__name__)

DEFAULT_CURRENCY = "USD"

# Minimum field counts, record code included
FILE_HEADER_FIELDS     = 9
FILE_TRAILER_FIELDS    = 4
GROUP_HEADER_FIELDS    = 7
GROUP_TRAILER_FIELDS   = 4
ACCOUNT_HEADER_FIELDS  = 3   # amounts are optional: "03,ACCT1,USD,040,1000,CHK/" has 6
ACCOUNT_TRAILER_FIELDS = 3


# ---------------------------------------------------------------------------
# Data Classes
# ---------------------------------------------------------------------------
@dataclass
class AccountRecord:
    customer_account_number: str = ""
    currency_code: str = ""
    amounts: List[Amount] = field(default_factory=list)
    transactions: List[TransactionRecord] = field(default_factory=list)
    # Trailer
    total: Optional[int] = None
    number_of_records: Optional[int] = None
    # Physical records actually read, 03 through 49
    records_read: int = 0


@dataclass
class GroupRecord:
    ultimate_receiver: str = ""
    originator: str = ""
    status: GroupStatus = GroupStatus.UNKNOWN
    status_code: str = ""
    as_of_date: Optional[date] = None
    as_of_time: Optional[TimeValue] = None
    currency_code: str = ""
    as_of_date_modifier: Optional[AsOfDateModifier] = None
    accounts: List[AccountRecord] = field(default_factory=list)
    # Trailer
    total: Optional[int] = None
    number_of_accounts: Optional[int] = None
    number_of_records: Optional[int] = None
    records_read: int = 0


@dataclass
class FileRecord:
    sender: str = ""
    receiver: str = ""
    creation_date: Optional[date] = None
    creation_time: Optional[TimeValue] = None
    file_id: str = ""
    physical_record_length: Optional[int] = None
    block_size: Optional[int] = None
    version_number: Optional[int] = None
    groups: List[GroupRecord] = field(default_factory=list)
    # Trailer
    total: Optional[int] = None
    number_of_groups: Optional[int] = None
    number_of_records: Optional[int] = None
    records_read: int = 0


@dataclass
class ControlMismatch:
    level: str          # "file", "group" or "account"
    identifier: str
    field: str
    stated: Optional[int]
    actual: int

    def __str__(self) -> str:
        return f"{self.level} {self.identifier}: {self.field} stated {self.stated}, actual {self.actual}"


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------
def _require(fields: List[str], minimum: int, record: str) -> None:
    if len(fields) < minimum:
        raise FieldCountError(record, minimum, len(fields))


def _build_account(node: Node, default_currency: str) -> AccountRecord:
    header_fields = node.fields()
    _require(header_fields, ACCOUNT_HEADER_FIELDS, "account header")

    trailer_fields = node.sibling_fields()
    _require(trailer_fields, ACCOUNT_TRAILER_FIELDS, "account trailer")

    return AccountRecord(
        customer_account_number=parse_string(header_fields[1]),
        currency_code=parse_currency(header_fields[2], default_currency),
        amounts=decode_amounts(header_fields[3:]),
        transactions=[decode_transaction(child) for child in node.children],
        total=parse_int(trailer_fields[1]),
        number_of_records=parse_int(trailer_fields[2]),
        records_read=node.record_count(),
    )


def _build_group(node: Node, default_currency: str) -> GroupRecord:
    header_fields = node.fields()
    _require(header_fields, GROUP_HEADER_FIELDS, "group header")

    trailer_fields = node.sibling_fields()
    _require(trailer_fields, GROUP_TRAILER_FIELDS, "group trailer")

    currency_code = parse_currency(header_fields[6], default_currency)

    return GroupRecord(
        ultimate_receiver=parse_string(header_fields[1]),
        originator=parse_string(header_fields[2]),
        status=GroupStatus.parse(header_fields[3]),
        status_code=parse_string(header_fields[3]),
        as_of_date=parse_date(header_fields[4]),
        as_of_time=parse_time(header_fields[5]),
        currency_code=currency_code,
        as_of_date_modifier=AsOfDateModifier.parse(get_field(header_fields, 7)),
        accounts=[_build_account(child, currency_code) for child in node.children],
        total=parse_int(trailer_fields[1]),
        number_of_accounts=parse_int(trailer_fields[2]),
        number_of_records=parse_int(trailer_fields[3]),
        records_read=node.record_count(),
    )


def build_file(root: Node, default_currency: str = DEFAULT_CURRENCY) -> FileRecord:
    """Decode a scanned tree into a FileRecord. The first failure propagates."""
    header_fields = root.fields()
    _require(header_fields, FILE_HEADER_FIELDS, "file header")

    trailer_fields = root.sibling_fields()
    _require(trailer_fields, FILE_TRAILER_FIELDS, "file trailer")

    return FileRecord(
        sender=parse_string(header_fields[1]),
        receiver=parse_string(header_fields[2]),
        creation_date=parse_date(header_fields[3]),
        creation_time=parse_time(header_fields[4]),
        file_id=parse_string(header_fields[5]),
        physical_record_length=parse_int(header_fields[6]),
        block_size=parse_int(header_fields[7]),
        version_number=parse_int(header_fields[8]),
        groups=[_build_group(child, default_currency) for child in root.children],
        total=parse_int(trailer_fields[1]),
        number_of_groups=parse_int(trailer_fields[2]),
        number_of_records=parse_int(trailer_fields[3]),
        records_read=root.record_count(),
    )


def parse_bai2(
    content: str,
    default_currency: str = DEFAULT_CURRENCY,
    strict: bool = False,
) -> FileRecord:
    """
    Parse a full BAI2 file string into a FileRecord object.
    Raises a Bai2Error (a ValueError) on malformed input. With strict=True,
    trailer control totals that disagree with the records read raise
    ControlTotalError; otherwise they are only logged.
    """
    root = scan(content)
    file_rec = build_file(root, default_currency)

    mismatches = control_total_mismatches(file_rec)
    if mismatches:
        if strict:
            raise ControlTotalError(mismatches)
        for mismatch in mismatches:
            logger.warning(f"Control total mismatch: {mismatch}")

    logger.info(
        f"Parsed {len(file_rec.groups)} group(s), "
        f"{sum(len(g.accounts) for g in file_rec.groups)} account(s), "
        f"{sum(len(a.transactions) for g in file_rec.groups for a in g.accounts)} transaction(s)"
    )
    return file_rec


# ---------------------------------------------------------------------------
# Control totals
# ---------------------------------------------------------------------------
def account_total(account: AccountRecord) -> int:
    """Sum of every amount in the account header and its transactions."""
    total = sum(a.amount or 0 for a in account.amounts)
    total += sum(t.amount or 0 for t in account.transactions)
    return total


def control_total_mismatches(file_rec: FileRecord) -> List[ControlMismatch]:
    """Compare each trailer's stated totals and counts with what was read."""
    mismatches = []

    def check(level, identifier, name, stated, actual):
        if stated != actual:
            mismatches.append(ControlMismatch(level, identifier, name, stated, actual))

    file_total = 0
    for group_index, group in enumerate(file_rec.groups, start=1):
        group_id = group.originator or str(group_index)
        group_total = 0
        for account in group.accounts:
            actual = account_total(account)
            group_total += actual
            check("account", account.customer_account_number, "total", account.total, actual)
            check("account", account.customer_account_number, "number_of_records",
                  account.number_of_records, account.records_read)

        file_total += group_total
        check("group", group_id, "total", group.total, group_total)
        check("group", group_id, "number_of_accounts", group.number_of_accounts, len(group.accounts))
        check("group", group_id, "number_of_records", group.number_of_records, group.records_read)

    check("file", file_rec.file_id, "total", file_rec.total, file_total)
    check("file", file_rec.file_id, "number_of_groups", file_rec.number_of_groups, len(file_rec.groups))
    check("file", file_rec.file_id, "number_of_records", file_rec.number_of_records, file_rec.records_read)
    return mismatches


# ---------------------------------------------------------------------------
# JSON Export
# ---------------------------------------------------------------------------
def _jsonable(value):
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, time):
        return format_time(value)
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_jsonable(v) for v in value]
    return value


def to_dict(file_rec: FileRecord) -> dict:
    """Plain-dict form of the document: ISO dates, HH:MM:SS times, enum values."""
    return _jsonable(asdict(file_rec))


def to_json(file_rec: FileRecord, indent: Optional[int] = 2) -> str:
    return json.dumps(to_dict(file_rec), indent=indent)


# ---------------------------------------------------------------------------
# CSV Export Helpers
# ---------------------------------------------------------------------------
def _format_amount(amount: Optional[int]) -> str:
    """BAI2 amounts are in minor units (cents) - render as a dollar string."""
    if amount is None:
        return ""
    return "{:,.2f}".format(amount / 100)


def _iso(value: Optional[date]) -> str:
    return value.isoformat() if value else ""


def file_to_balances_rows(file_rec: FileRecord) -> List[dict]:
    """Flatten all account amount records into a list of dicts."""
    rows = []
    for group in file_rec.groups:
        for account in group.accounts:
            for amount in account.amounts:
                rows.append({
                    "file_sender":           file_rec.sender,
                    "file_receiver":         file_rec.receiver,
                    "file_id":               file_rec.file_id,
                    "file_creation_date":    _iso(file_rec.creation_date),
                    "group_originator":      group.originator,
                    "group_receiver":        group.ultimate_receiver,
                    "group_status":          group.status.value,
                    "as_of_date":            _iso(group.as_of_date),
                    "as_of_time":            format_time(group.as_of_time) or "",
                    "currency_code":         account.currency_code,
                    "customer_account":      account.customer_account_number,
                    "type_code":             amount.type_code,
                    "kind":                  amount.kind.value,
                    "category":              amount.category,
                    "amount":                amount.amount,
                    "amount_formatted":      _format_amount(amount.amount),
                    "item_count":            amount.item_count,
                    "funds_type":            amount.funds_type.value,
                    "account_control_total": account.total,
                    "account_record_count":  account.number_of_records,
                })
    return rows


def file_to_transaction_rows(file_rec: FileRecord) -> List[dict]:
    """Flatten all transaction records, one dict per 16 record."""
    rows = []
    for group in file_rec.groups:
        for account in group.accounts:
            for txn in account.transactions:
                is_cr = txn.is_credit
                is_dr = txn.direction == Direction.DEBIT
                amt = _format_amount(txn.amount)

                rows.append({
                    "as_of_date":          _iso(group.as_of_date),
                    "bank_id":             group.originator,
                    "customer_account":    account.customer_account_number,
                    "currency_code":       account.currency_code,
                    "type_code":           txn.type_code,
                    "direction":           txn.direction.value,
                    "category":            txn.category,
                    "amount":              txn.amount,
                    "credit_amount":       amt if is_cr else "",
                    "debit_amount":        amt if is_dr else "",
                    "funds_type":          txn.funds_type.value,
                    "value_date":          _iso(txn.value_date),
                    "bank_reference":      txn.bank_reference_number,
                    "customer_reference":  txn.customer_reference_number,
                    "text":                " ".join(t for t in txn.text if t),
                })
    return rows


def balances_frame(file_rec: FileRecord) -> pd.DataFrame:
    return pd.DataFrame(file_to_balances_rows(file_rec))


def transactions_frame(file_rec: FileRecord) -> pd.DataFrame:
    return pd.DataFrame(file_to_transaction_rows(file_rec))
