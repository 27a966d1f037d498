"""Shared utility functions for Crayon.

Provides async command execution, case conversion helpers, file-system
helpers, and Rich-based console output.
"""

from __future__ import annotations

import asyncio
import re
from pathlib import Path, PurePosixPath

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: str | list[str],
    cwd: str | Path | None = None,
    timeout: int = 300,
    capture: bool = True,
    env: dict[str, str] | None = None,
) -> tuple[int, str, str]:
    """Run a command asynchronously.

    Args:
        cmd: Shell command string or list of arguments.
        cwd: Working directory for the child process.
        timeout: Maximum wall-clock seconds before the process is killed.
        capture: Whether to capture stdout/stderr (if ``False`` they inherit
            the parent's streams).
        env: Optional extra environment variables merged on top of ``os.environ``.

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.  If *capture* is ``False``
        the stdout/stderr strings will be empty.
    """
    import os

    merged_env: dict[str, str] | None = None
    if env:
        merged_env = {**os.environ, **env}

    stdout_pipe = asyncio.subprocess.PIPE if capture else None
    stderr_pipe = asyncio.subprocess.PIPE if capture else None

    if isinstance(cmd, list):
        process = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=stdout_pipe,
            stderr=stderr_pipe,
            cwd=str(cwd) if cwd else None,
            env=merged_env,
        )
    else:
        process = await asyncio.create_subprocess_shell(
            cmd,
            stdout=stdout_pipe,
            stderr=stderr_pipe,
            cwd=str(cwd) if cwd else None,
            env=merged_env,
        )

    try:
        stdout_bytes, stderr_bytes = await asyncio.wait_for(
            process.communicate(), timeout=timeout
        )
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        return (
            -1,
            "",
            f"Command timed out after {timeout}s: {cmd if isinstance(cmd, str) else ' '.join(cmd)}",
        )

    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return (process.returncode or 0, stdout_str, stderr_str)


# ---------------------------------------------------------------------------
# Case helpers
# ---------------------------------------------------------------------------

# Acronym runs, capitalised/lowercase words, and digit runs.
_WORD_RE = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|[0-9]+")


def split_words(value: str) -> list[str]:
    """Split an identifier into words on case changes, digits and separators.

    Examples::

        split_words("myComponent")  -> ["my", "Component"]
        split_words("user-card_2")  -> ["user", "card", "2"]
        split_words("myURL")        -> ["my", "URL"]
    """
    return _WORD_RE.findall(value)


def pascal_case(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``SomeThing``."""
    return "".join(word.capitalize() for word in split_words(value))


def camel_case(value: str) -> str:
    """Convert ``some-thing`` or ``SomeThing`` to ``someThing``."""
    words = split_words(value)
    if not words:
        return ""
    return words[0].lower() + "".join(word.capitalize() for word in words[1:])


def kebab_case(value: str) -> str:
    """Convert ``SomeThing`` or ``some_thing`` to ``some-thing``."""
    return "-".join(word.lower() for word in split_words(value))


def is_camel_case(value: str) -> bool:
    """Return ``True`` when *value* is already in canonical camelCase."""
    return bool(value) and camel_case(value) == value


# ---------------------------------------------------------------------------
# Path helpers
# ---------------------------------------------------------------------------


def path_segments(path: str) -> list[str]:
    """Return the meaningful segments of a relative component path.

    ``./components/Badge/`` and ``components/Badge`` both give
    ``["components", "Badge"]``.
    """
    return [part for part in PurePosixPath(path.replace("\\", "/")).parts if part not in ("/", ".")]


def to_root_prefix(path: str) -> str:
    """Return one ``../`` per segment of *path*."""
    return "../" * len(path_segments(path))


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Returns:
        The resolved ``Path`` object.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path.resolve()


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_header(title: str) -> None:
    """Print a bold command header."""
    console.print()
    console.print(f"[bold bright_cyan]{escape(title)}[/bold bright_cyan]")
    console.print()


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(escape(key), escape(str(value)))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")


def print_info(message: str) -> None:
    """Print a plain informational message."""
    console.print(f"[cyan]{escape(message)}[/cyan]")
