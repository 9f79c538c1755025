"""Shared fixtures for the lslrtree test suite."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from lslrtree import parse_listing


# Smallest interesting tree:
# /
# ├── sub/
# │   └── a.txt (10 bytes)
# └── b.log (5 bytes)
SMALL_LISTING = """\
.:
total 0
drwxr-xr-x 2 u g 4096 Jan 1 00:00 sub
-rw-r--r-- 1 u g 5 Jan 1 00:00 b.log

./sub:
total 0
-rw-r--r-- 1 u g 10 Jan 1 00:00 a.txt
"""

# A more realistic listing with padded columns, a year instead of a time,
# a name with spaces and a symlink.
# /
# ├── src/
# │   ├── lib/
# │   │   ├── util.c (300)
# │   │   └── a (7)
# │   └── main.c (1200)
# ├── README.md (42)
# ├── empty file.txt (0)
# └── link -> README.md (9)
PROJECT_LISTING = """\
.:
total 16
drwxr-xr-x 3 alice staff 4096 Jan  1 00:00 src
-rw-r--r-- 1 alice staff   42 Jan  1 00:00 README.md
-rw-r--r-- 1 alice staff    0 Feb 29  2004 empty file.txt
lrwxrwxrwx 1 alice staff    9 Jan  1 00:00 link -> README.md

./src:
total 8
drwxr-xr-x 2 alice staff 4096 Jan  1 00:00 lib
-rw-r--r-- 1 alice staff 1200 Jan  1 00:00 main.c

./src/lib:
total 4
-rw-r--r-- 1 alice staff  300 Mar 10 12:34 util.c
-rw-r--r-- 1 alice staff    7 Mar 10 12:34 a

"""


@pytest.fixture
def small_root():
    """Root of SMALL_LISTING."""
    return parse_listing(SMALL_LISTING)


@pytest.fixture
def project_root():
    """Root of PROJECT_LISTING."""
    return parse_listing(PROJECT_LISTING)


@pytest.fixture
def listing_file(tmp_path):
    """PROJECT_LISTING written to a file."""
    path = tmp_path / "ls-lR.txt"
    path.write_text(PROJECT_LISTING, encoding="utf-8")
    return path
