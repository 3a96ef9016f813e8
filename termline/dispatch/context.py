# dispatch/context.py

import os
import logging
import subprocess
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

FALLBACK_USER = "user"
FALLBACK_HOST = "localhost"
QUERY_TIMEOUT = 2.0


def filesystem_root() -> str:
    return os.path.abspath(os.sep)


@dataclass(frozen=True)
class SessionContext:
    """
    Where the session is and who it runs as.

    Only a successful directory change produces a new working directory;
    user, host and home are fixed once resolved.
    """
    working_directory: str
    user: str = FALLBACK_USER
    host: str = FALLBACK_HOST
    home: str = ""

    def display_path(self) -> str:
        """Working directory with the home prefix shown as ~."""
        path, home = self.working_directory, self.home
        if home and home != filesystem_root():
            if path == home:
                return "~"
            if path.startswith(home.rstrip(os.sep) + os.sep):
                return "~" + path[len(home.rstrip(os.sep)):]
        return path

    def prompt_text(self, branch: str = "") -> str:
        text = f"{self.user}@{self.host}:{self.display_path()}"
        return f"{text} ({branch})" if branch else text


def _run_query(args, cwd: Optional[str] = None) -> str:
    """Run a short external query; any failure yields ""."""
    try:
        result = subprocess.run(
            args, cwd=cwd, capture_output=True, text=True, timeout=QUERY_TIMEOUT
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug(f"Query {args[0]} failed: {e}")
        return ""
    if result.returncode != 0:
        return ""
    return result.stdout.strip()


def resolve_working_directory() -> str:
    try:
        return os.getcwd()
    except OSError as e:
        logger.debug(f"Working directory unreadable, using root: {e}")
        return filesystem_root()


def resolve_user(environ: Mapping[str, str]) -> str:
    for key in ("USER", "USERNAME", "LOGNAME"):
        if environ.get(key):
            return environ[key]
    return FALLBACK_USER


def resolve_host(environ: Mapping[str, str]) -> str:
    return environ.get("HOSTNAME") or _run_query(["hostname"]) or FALLBACK_HOST


def resolve_home(environ: Mapping[str, str]) -> str:
    home = environ.get("HOME") or os.path.expanduser("~")
    if not home or home == "~":
        return filesystem_root()
    return home


def resolve_context(environ: Optional[Mapping[str, str]] = None) -> SessionContext:
    """Resolve the startup context, falling back instead of failing."""
    environ = os.environ if environ is None else environ
    return SessionContext(
        working_directory=resolve_working_directory(),
        user=resolve_user(environ),
        host=resolve_host(environ),
        home=resolve_home(environ),
    )


def query_branch(working_directory: str) -> str:
    """Current version-control branch, or "" outside a repository."""
    branch = _run_query(["git", "rev-parse", "--abbrev-ref", "HEAD"], cwd=working_directory)
    return "" if branch == "HEAD" else branch
