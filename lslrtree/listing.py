"""Parser for recursive directory listings (ls -lR output).

A listing is a sequence of blocks, one per directory:

    ./sub:
    total 8
    -rw-r--r-- 1 user group   10 Jan  1 00:00 a.txt
    drwxr-xr-x 2 user group 4096 Jan  1 00:00 nested
    <blank line>

The first block becomes the root of the tree. Each directory entry
announces a later block by its label (the parent label joined with the
name, so "/" and "bin" give "/bin"), and that block's entries are attached
to the node created for the entry.
"""

import logging
import posixpath
import re
from pathlib import Path
from typing import Dict, Iterable, Iterator, Optional, Union

from .config import ListingConfig
from .core.node import DirectoryNode, FileNode, ListingNode
from .errors import EmptyListingError, MalformedListingLine

logger = logging.getLogger(__name__)

# type char + permission bits, link count, owner, group, size, date, name
ENTRY_PATTERN = re.compile(
    r"^(?P<type>\S)\S*\s+"
    r"\d+\s+"
    r"\S+\s+\S+\s+"
    r"(?P<size>[0-9]+)\s+"
    r"\S+\s+\d{1,2}\s+(?:\d{1,2}:\d{2}|\d{4})\s+"
    r"(?P<name>.+)$"
)


class _LineReader:
    """Line iterator that strips line endings and counts lines."""

    def __init__(self, stream: Iterable[str]):
        self._lines = iter(stream)
        self.lineno = 0

    def next_line(self) -> Optional[str]:
        raw = next(self._lines, None)
        if raw is None:
            return None
        self.lineno += 1
        return raw.rstrip("\r\n")

    def next_nonblank(self) -> Optional[str]:
        while True:
            line = self.next_line()
            if line is None or line.strip():
                return line

    def block_lines(self) -> Iterator[str]:
        """Yield lines up to the blank terminator or end of input."""
        while True:
            line = self.next_line()
            if line is None or not line.strip():
                return
            yield line


class ListingParser:
    """Builds a tree of ListingNode objects from ls -lR text.

    The parser keeps no state between calls; the label-to-directory mapping
    lives only for the duration of one parse().
    """

    def __init__(self, config: Optional[ListingConfig] = None):
        """Initialize parser.

        Args:
            config: Parsing options (defaults to ListingConfig())

        Raises:
            ValueError: If the configuration is invalid
        """
        self.config = config or ListingConfig()
        config_errors = self.config.validate()
        if config_errors:
            raise ValueError(f"Invalid configuration: {'; '.join(config_errors)}")

    def parse_file(self, path: Union[str, Path]) -> DirectoryNode:
        """Parse a listing stored in a file.

        Raises:
            OSError: If the file cannot be read
            ListingError: If the content is not a valid listing
        """
        logger.debug("Reading listing from %s", path)
        with open(path, encoding=self.config.encoding, errors="replace") as stream:
            return self.parse(stream)

    def parse(self, stream: Iterable[str]) -> DirectoryNode:
        """Parse a listing from any iterable of lines.

        Args:
            stream: Text file or other iterable yielding lines

        Returns:
            The root directory of the listing

        Raises:
            MalformedListingLine: If a header or entry line is malformed, or
                (in strict mode) a block names a directory never listed
            EmptyListingError: If the stream holds no block at all
        """
        lines = _LineReader(stream)
        directories: Dict[str, DirectoryNode] = {}
        root: Optional[DirectoryNode] = None
        block_count = 0
        node_count = 0

        while True:
            header = lines.next_nonblank()
            if header is None:
                break

            label = self._parse_header(header, lines.lineno)
            directory = directories.pop(label, None)
            if directory is None:
                if root is None:
                    directory = root = DirectoryNode("", None, "", 0)
                elif self.config.strict:
                    raise MalformedListingLine(
                        header, lines.lineno, "block for unknown directory"
                    )
                else:
                    logger.warning(
                        "Skipping block for unknown directory %r at line %d",
                        label, lines.lineno
                    )
                    # Detached: entries are parsed for validation, then dropped
                    directory = DirectoryNode(header, None, label, 0)

            block_count += 1
            total = lines.next_line()
            if total is None:
                break
            if not total.strip():
                continue

            for line in lines.block_lines():
                node = self._parse_entry(line, directory, lines.lineno)
                directory._append_child(node)
                node_count += 1
                if node.is_directory():
                    directories[posixpath.join(label, node.name)] = node

            logger.debug("Parsed block %r: %d entries", label, len(directory.children))

        if root is None:
            raise EmptyListingError()

        logger.info("Parsed listing: %d blocks, %d nodes", block_count, node_count + 1)
        return root

    @staticmethod
    def _parse_header(line: str, lineno: int) -> str:
        label, separator, _ = line.rpartition(":")
        if not separator:
            raise MalformedListingLine(line, lineno, "expected directory header")
        return label

    @staticmethod
    def _parse_entry(line: str, parent: DirectoryNode, lineno: int) -> ListingNode:
        match = ENTRY_PATTERN.match(line)
        if match is None:
            raise MalformedListingLine(line, lineno)

        size = int(match.group('size'))
        name = match.group('name')
        # Anything that is not a directory ('-', 'l', 'c', ...) counts as a file
        if match.group('type') == 'd':
            return DirectoryNode(line, parent, name, size)
        return FileNode(line, parent, name, size)
