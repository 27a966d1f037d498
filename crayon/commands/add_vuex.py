"""``add:vuex`` -- wire a Vuex store into an existing Vue entry file."""

from __future__ import annotations

import asyncio
import re
from pathlib import Path
from typing import Awaitable, Callable

from crayon.config import CrayonConfig
from crayon.exceptions import EntryPointError
from crayon.utils import print_header, print_success, print_warning, run_command

COMMAND_NAME = "add:vuex"

STORE_STUB = Path(__file__).resolve().parent.parent / "stubs" / "vuex" / "store.js"
STORE_IMPORT = "import store from './store';"
STORE_KEY = "    store,"

# ``new Vue({`` optionally assigned, e.g. ``const app = new Vue({``.
_BOOTSTRAP_RE = re.compile(r"^\s*(?:(?:const|let|var)\s+\w+\s*=\s*)?new Vue\(\{\s*$")

CommandRunner = Callable[..., Awaitable[tuple[int, str, str]]]


def install_command(package_manager: str, package: str) -> list[str]:
    """``yarn add <pkg>``, ``pnpm add <pkg>`` or ``npm install <pkg>``."""
    if package_manager == "npm":
        return ["npm", "install", package]
    return [package_manager, "add", package]


def find_bootstrap_line(lines: list[str]) -> int:
    """Index of the ``new Vue({`` line.

    Raises:
        EntryPointError: If the entry file has no Vue bootstrap block.
    """
    for index, line in enumerate(lines):
        if _BOOTSTRAP_RE.match(line):
            return index
    raise EntryPointError("Please add Vue to your project first.")


def splice_entry(source: str) -> str:
    """Return *source* with the store import and the ``store`` key inserted."""
    lines = source.split("\n")
    if STORE_IMPORT in (line.strip() for line in lines):
        raise EntryPointError("Vuex store is already imported in the entry file.")

    bootstrap = find_bootstrap_line(lines)
    lines.insert(bootstrap + 1, STORE_KEY)
    lines[0:0] = [STORE_IMPORT, ""]
    return "\n".join(lines)


class AddVuexCommand:
    """Installs Vuex, creates ``store/index.js`` and patches the entry file.

    The entry file is validated before anything is installed or written.
    """

    def __init__(
        self,
        config: CrayonConfig,
        cwd: str | Path | None = None,
        runner: CommandRunner = run_command,
    ) -> None:
        self.config = config
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()
        self.runner = runner

    @property
    def entry_path(self) -> Path:
        return self.config.entry_path(self.cwd)

    @property
    def store_path(self) -> Path:
        return self.entry_path.parent / "store" / "index.js"

    async def run(self) -> Path:
        """Run the command and return the patched entry file.

        Raises:
            EntryPointError: Missing entry file or bootstrap block.
        """
        print_header(COMMAND_NAME)

        entry = self.entry_path
        if not entry.is_file():
            raise EntryPointError(f"App entry point not found: {entry}")

        source = await asyncio.to_thread(entry.read_text, encoding="utf-8")
        patched = splice_entry(source)

        returncode, stdout, stderr = await self.runner(
            install_command(self.config.package_manager, "vuex"), cwd=self.cwd
        )
        if returncode != 0:
            print_warning(f"Installing vuex failed: {stderr or stdout}")

        store = self.store_path
        await asyncio.to_thread(store.parent.mkdir, parents=True, exist_ok=True)
        await asyncio.to_thread(store.write_text, STORE_STUB.read_text(encoding="utf-8"), encoding="utf-8")
        await asyncio.to_thread(entry.write_text, patched, encoding="utf-8")

        print_success("Vuex installed successfully.")
        return entry
