"""Interactive shell over a parsed listing.

The shell is thin glue: it reads command lines, splits them like a POSIX
shell, and dispatches to a small fixed command table. All session state
(the tree root and the current directory) lives on the Shell instance.
"""

import functools
import logging
import shlex
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, TextIO, Union

from .api import load_listing, resolve_path
from .config import SearchConfig, ShellConfig, TraversalStrategy
from .core.node import DirectoryNode, ListingNode
from .errors import CommandError, LsLRError
from .query import parse_query
from .search import SearchExecutor

logger = logging.getLogger(__name__)

Command = Callable[[List[str]], None]


def _enable_line_editing() -> bool:
    """Load readline so input() gets line editing and history.

    Returns:
        False on platforms that ship without the readline module
    """
    try:
        import readline  # noqa: F401
    except ImportError:
        logger.debug("readline unavailable, reading lines without editing")
        return False
    return True


class Shell:
    """A pwd/cd/ls/dfs/bfs session over one listing.

    Example:
        >>> shell = Shell(root, stdin=io.StringIO("cd sub\\npwd\\n"))
        >>> shell.run()
        /sub
    """

    def __init__(self,
                 root: DirectoryNode,
                 config: Optional[ShellConfig] = None,
                 stdin: Optional[TextIO] = None,
                 stdout: Optional[TextIO] = None):
        """Initialize a session positioned at the root.

        Args:
            root: Root of the parsed listing
            config: Shell options
            stdin: Command source (defaults to sys.stdin)
            stdout: Output sink (defaults to sys.stdout)

        Raises:
            ValueError: If the configuration is invalid
        """
        self.config = config or ShellConfig()
        config_errors = self.config.validate()
        if config_errors:
            raise ValueError(f"Invalid configuration: {'; '.join(config_errors)}")

        self.root = root
        self.current_directory: DirectoryNode = root
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self._running = False

        self._commands: Dict[str, Command] = {
            "quit": self._quit,
            "exit": self._quit,
            "pwd": self._pwd,
            "cd": self._cd,
            "ls": self._ls,
            "dfs": functools.partial(self._search, TraversalStrategy.DEPTH_FIRST),
            "bfs": functools.partial(self._search, TraversalStrategy.BREADTH_FIRST),
        }

    @classmethod
    def from_file(cls, path: Union[str, Path], config: Optional[ShellConfig] = None, **kwargs) -> 'Shell':
        """Load a listing file and open a session on it."""
        config = config or ShellConfig()
        root = load_listing(path, config.listing)
        return cls(root, config=config, **kwargs)

    @property
    def interactive(self) -> bool:
        """Whether to prompt before reading each line."""
        if self.config.interactive is not None:
            return self.config.interactive
        isatty = getattr(self.stdin, "isatty", None)
        return bool(isatty and isatty())

    @property
    def commands(self) -> List[str]:
        return sorted(self._commands)

    def run(self) -> None:
        """Read and execute commands until end of input or quit.

        Errors raised by a command are printed as one line; the session
        then continues with the next command.

        An interactive session on the process stdin reads through input(),
        with readline editing and history where the platform has it.
        """
        self._running = True
        use_terminal = self.interactive and self.stdin is sys.stdin
        if use_terminal:
            _enable_line_editing()
        while self._running:
            line = self._read_terminal() if use_terminal else self._read_stream()
            if line is None:
                break
            try:
                self.execute_line(line)
            except LsLRError as e:
                logger.debug("Command %r failed: %s", line.strip(), e)
                self._print(str(e))
        self._running = False

    def _read_terminal(self) -> Optional[str]:
        # input() goes through readline when it is loaded: editing and history
        try:
            return input(self.config.prompt)
        except EOFError:
            return None

    def _read_stream(self) -> Optional[str]:
        if self.interactive:
            self.stdout.write(self.config.prompt)
            self.stdout.flush()
        return self.stdin.readline() or None

    def execute_line(self, line: str) -> None:
        """Split a command line and execute it. Blank lines are ignored.

        Raises:
            CommandError: If the line cannot be split or names no command
            LsLRError: Whatever the command itself raises
        """
        try:
            argv = shlex.split(line)
        except ValueError as e:
            raise CommandError(f"invalid command line - {e}") from e
        if argv:
            self.execute(argv)

    def execute(self, argv: Sequence[str]) -> None:
        """Execute one already-split command.

        Raises:
            CommandError: If argv[0] is not a known command
        """
        name, args = argv[0], list(argv[1:])
        command = self._commands.get(name)
        if command is None:
            raise CommandError(f"no such command - {name}")
        logger.debug("Dispatching %s %r", name, args)
        command(args)

    def resolve(self, path: str) -> ListingNode:
        """Resolve path against the current directory."""
        return resolve_path(self.root, path, self.current_directory)

    # Commands

    def _quit(self, args: List[str]) -> None:
        self._running = False

    def _pwd(self, args: List[str]) -> None:
        self._print(self.current_directory.path())

    def _cd(self, args: List[str]) -> None:
        if not args:
            return
        path = args[0]
        node = self.resolve(path)
        if not isinstance(node, DirectoryNode):
            raise CommandError(f"not a directory - {path}")
        self.current_directory = node

    def _ls(self, args: List[str]) -> None:
        for child in self.current_directory.children:
            self._print(str(child))

    def _search(self, strategy: TraversalStrategy, args: List[str]) -> None:
        expression = parse_query(args)
        executor = SearchExecutor(expression, config=SearchConfig(strategy=strategy))
        executor.emit(self.current_directory, self.stdout)

    def _print(self, text: str) -> None:
        self.stdout.write(text + "\n")
