"""Shared BAI2 sample documents for the test suite."""

import logging
import textwrap

import pytest


def _dedent(s: str) -> str:
    return textwrap.dedent(s).lstrip("\n").rstrip() + "\n"


# One file, one group, one account, one transaction. The trailer record
# counts exclude the trailer itself, so they do not match a strict count.
EXAMPLE_BAI2 = _dedent(
    """
    01,SENDER,RECEIVER,250101,0800,FILEID,80,10,2/
    02,RECV,ORIG,1,250101,0800,USD,1/
    03,ACCT1,USD,040,1000,CHK/
    16,475,500,0,REF1,CREF1,Memo text/
    49,1500,2/
    98,1500,1,4/
    99,1500,1,6/
    """
)

# Two groups; every trailer total and count is exact.
SAMPLE_BAI2 = _dedent(
    """
    01,BANKID,CUSTID,250115,0930,FILE01,80,10,2/
    02,CUSTID,BANKID,1,250114,2400,USD,2/
    03,1111,USD,010,100000,,,015,120000,,/
    16,195,25000,0,BREF1,CREF1,WIRE FROM ACME/
    16,475,5000,V,250116,1200,BREF2,CREF2,CHECK 1001/
    88,PAID AT BRANCH/
    49,250000,5/
    03,2222,,040,5000,2,D,2,0,3000,1,2000/
    16,142,3000,S,1000,1000,1000,BREF3,,ACH/
    49,8000,3/
    98,258000,2,10/
    02,CUSTID,BANKID,1,250114,,CAD,/
    98,0,0,2/
    99,258000,2,14/
    """
)


@pytest.fixture
def example_content() -> str:
    return EXAMPLE_BAI2


@pytest.fixture
def sample_content() -> str:
    return SAMPLE_BAI2


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """The CLI reconfigures the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
