import logging

import pytest

from bai2_errors import StructuralError
from bai2_scanner import Node, RecordKind, Scanner, classify, scan


FILE_HEADER = "01,SENDER,RECEIVER,250101,0800,FILEID,80,10,2/"
GROUP_HEADER = "02,RECV,ORIG,1,250101,0800,USD,1/"
ACCOUNT = "03,ACCT1,USD,040,1000,,/"
TXN = "16,475,500,0,REF1,CREF1,Memo/"


def _lines(*lines):
    return "\n".join(lines) + "\n"


def test_classify_reads_the_first_two_characters():
    assert classify(FILE_HEADER) == RecordKind.FILE_HEADER
    assert classify("02") == RecordKind.GROUP_HEADER
    assert classify("88,more/") == RecordKind.CONTINUATION
    assert classify("49,1500,2/") == RecordKind.ACCOUNT_TRAILER
    assert classify("77,VENDOR/") == RecordKind.UNRECOGNIZED


def test_classify_blank_lines():
    assert classify("") == RecordKind.BLANK
    assert classify("0") == RecordKind.BLANK
    assert classify("    ") == RecordKind.BLANK


def test_example_tree(example_content):
    root = scan(example_content)

    assert root.kind == RecordKind.FILE_HEADER
    assert root.sibling.kind == RecordKind.FILE_TRAILER
    assert len(root.children) == 1

    group = root.children[0]
    assert group.kind == RecordKind.GROUP_HEADER
    assert group.sibling.kind == RecordKind.GROUP_TRAILER
    assert len(group.children) == 1

    account = group.children[0]
    assert account.kind == RecordKind.ACCOUNT_IDENTIFIER
    assert account.sibling.line == "49,1500,2/"
    assert len(account.children) == 1

    txn = account.children[0]
    assert txn.kind == RecordKind.TRANSACTION_DETAIL
    assert txn.sibling is None
    assert txn.children == []


def test_nested_counts(sample_content):
    root = scan(sample_content)
    assert len(root.children) == 2
    assert [len(g.children) for g in root.children] == [2, 0]
    assert [len(a.children) for a in root.children[0].children] == [2, 1]


def test_leading_blank_lines_are_skipped():
    root = scan(_lines("", "  ", FILE_HEADER, GROUP_HEADER, "98,0,0,2/", "99,0,1,4/"))
    assert root.line == FILE_HEADER
    assert root.line_number == 3


def test_first_record_must_be_a_file_header():
    with pytest.raises(StructuralError, match="file header not found"):
        scan(_lines("", GROUP_HEADER, "98,0,0,2/"))


def test_empty_input():
    with pytest.raises(StructuralError, match="no lines found"):
        scan("")
    with pytest.raises(StructuralError, match="no lines found"):
        scan("\n\n")


def test_transaction_before_account_identifier_is_rejected():
    content = _lines(FILE_HEADER, GROUP_HEADER, TXN, "49,500,2/", "98,500,1,4/", "99,500,1,6/")
    with pytest.raises(StructuralError) as exc_info:
        scan(content)

    err = exc_info.value
    assert "transaction detail found without account identifier" in str(err)
    assert err.kind == "transaction detail"
    assert err.context == "file header > group header"
    assert err.line_number == 3


def test_account_trailer_without_account():
    content = _lines(FILE_HEADER, GROUP_HEADER, "49,500,2/")
    with pytest.raises(StructuralError, match="account trailer found without account identifier"):
        scan(content)


def test_group_trailer_inside_open_account():
    content = _lines(FILE_HEADER, GROUP_HEADER, ACCOUNT, "98,0,1,3/")
    with pytest.raises(StructuralError, match="group trailer found inside open account identifier"):
        scan(content)


def test_closed_group_does_not_accept_accounts():
    content = _lines(FILE_HEADER, GROUP_HEADER, "98,0,0,2/", ACCOUNT, "49,1000,2/", "99,0,1,6/")
    with pytest.raises(StructuralError, match="account identifier found without group header"):
        scan(content)


def test_second_file_header_is_rejected():
    with pytest.raises(StructuralError, match="file header found inside an open file"):
        scan(_lines(FILE_HEADER, FILE_HEADER))


def test_unclosed_records_at_end_of_input():
    with pytest.raises(StructuralError, match="end of file reached with open transaction detail"):
        scan(_lines(FILE_HEADER, GROUP_HEADER, ACCOUNT, TXN))
    with pytest.raises(StructuralError, match="end of file reached with open file header"):
        scan(_lines(FILE_HEADER, GROUP_HEADER, "98,0,0,2/"))


def test_unrecognized_records_are_skipped(example_content):
    lines = example_content.splitlines()
    lines.insert(3, "77,VENDOR SPECIFIC/")
    lines.insert(1, "X")
    root = scan("\n".join(lines))

    account = root.children[0].children[0]
    assert len(account.children) == 1
    assert all(c.line != "77,VENDOR SPECIFIC/" for c in account.continuations)


def test_continuation_extends_the_innermost_open_record():
    content = _lines(
        FILE_HEADER, GROUP_HEADER, ACCOUNT, "88,015,2000,,/",
        TXN, "88,MORE TEXT/", "49,3500,5/", "98,3500,1,7/", "99,3500,1,9/",
    )
    root = scan(content)
    account = root.children[0].children[0]
    txn = account.children[0]

    assert account.has_continuations()
    assert account.fields()[-4:] == ["015", "2000", "", "/"]
    assert txn.fields() == ["16", "475", "500", "0", "REF1", "CREF1", "Memo/", "MORE TEXT/"]


def test_continuation_after_trailer_extends_the_trailer():
    content = _lines(
        FILE_HEADER, GROUP_HEADER, ACCOUNT, "49,1000/", "88,3/", "98,1000,1,5/", "99,1000,1,7/",
    )
    root = scan(content)
    account = root.children[0].children[0]

    assert account.continuations == []
    assert account.sibling_fields() == ["49", "1000/", "3/"]
    assert root.children[0].continuations == []


def test_lines_after_file_trailer_do_not_change_the_tree(example_content, caplog):
    content = example_content + "\n" + GROUP_HEADER + "\n" + "98,0,0,2/\n"
    with caplog.at_level(logging.WARNING, logger="bai2_scanner"):
        root = scan(content)

    assert len(root.children) == 1
    assert "Ignored 2 record(s) after the file trailer" in caplog.text


def test_scanner_accepts_any_iterable_of_lines(example_content):
    root = Scanner(iter(example_content.splitlines())).scan()
    assert root.sibling is not None


def test_set_sibling_enforces_matching_trailer():
    header = Node(kind=RecordKind.GROUP_HEADER, line=GROUP_HEADER)
    with pytest.raises(StructuralError, match="account trailer cannot close group header"):
        header.set_sibling(Node(kind=RecordKind.ACCOUNT_TRAILER, line="49,0,2/"))

    txn = Node(kind=RecordKind.TRANSACTION_DETAIL, line=TXN)
    with pytest.raises(StructuralError):
        txn.set_sibling(Node(kind=RecordKind.ACCOUNT_TRAILER, line="49,0,2/"))


def test_record_count_spans_header_through_trailer(sample_content):
    root = scan(sample_content)
    group = root.children[0]
    assert [a.record_count() for a in group.children] == [5, 3]
    assert group.record_count() == 10
    assert root.record_count() == 14


def test_continuation_after_file_trailer_extends_the_trailer(example_content, caplog):
    content = example_content.replace("99,1500,1,6/", "99,1500,1/\n88,7/") + "\n16,475,500,0,,,/\n"
    with caplog.at_level(logging.WARNING, logger="bai2_scanner"):
        root = scan(content)

    assert root.sibling_fields() == ["99", "1500", "1/", "7/"]
    assert root.record_count() == 8
    assert "Ignored 1 record(s) after the file trailer" in caplog.text
