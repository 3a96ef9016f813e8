# dispatch/builtins.py

import os
from dataclasses import dataclass, replace
from typing import Callable, Dict, List

from .context import SessionContext
from .result import DispatchResult


@dataclass(frozen=True)
class Builtin:
    name: str
    handler: Callable
    help_text: str


BUILTINS: Dict[str, Builtin] = {}


def builtin(name: str, help_text: str):
    """Register a handler as a built-in command."""
    def register(handler):
        BUILTINS[name] = Builtin(name, handler, help_text)
        return handler
    return register


def resolve_directory(target: str, context: SessionContext) -> str:
    """Absolute, canonical form of a cd target relative to the context."""
    if target == "~" or target.startswith("~/"):
        target = context.home + target[1:]
    if not os.path.isabs(target):
        target = os.path.join(context.working_directory, target)
    return os.path.realpath(target)


@builtin("cd", "Change the working directory (default: home)")
def change_directory(dispatcher, args: List[str], context: SessionContext) -> DispatchResult:
    target = args[0] if args else "~"
    path = resolve_directory(target, context)
    if not os.path.exists(path):
        return DispatchResult.failure(f"cd: {target}: No such file or directory")
    if not os.path.isdir(path):
        return DispatchResult.failure(f"cd: {target}: Not a directory")
    try:
        os.chdir(path)
    except OSError as e:
        return DispatchResult.failure(f"cd: {target}: {e.strerror or e}")

    os.environ["OLDPWD"] = context.working_directory
    os.environ["PWD"] = path
    dispatcher.logger.debug(f"Changed directory: {context.working_directory} -> {path}")
    return DispatchResult(context_update=replace(context, working_directory=path))


@builtin("pwd", "Print the working directory")
def print_working_directory(dispatcher, args: List[str], context: SessionContext) -> DispatchResult:
    return DispatchResult.lines([context.working_directory])


@builtin("clear", "Clear the scrollback")
def clear_output(dispatcher, args: List[str], context: SessionContext) -> DispatchResult:
    return DispatchResult(clear_output=True)


@builtin("history", "List previously submitted commands")
def show_history(dispatcher, args: List[str], context: SessionContext) -> DispatchResult:
    entries = dispatcher.history.entries if dispatcher.history is not None else ()
    return DispatchResult.lines(
        f"{position:>4}  {line}" for position, line in enumerate(entries, start=1)
    )


@builtin("exit", "End the session")
def exit_session(dispatcher, args: List[str], context: SessionContext) -> DispatchResult:
    return DispatchResult(exit_session=True)


@builtin("help", "Show this list of built-in commands")
def show_help(dispatcher, args: List[str], context: SessionContext) -> DispatchResult:
    width = max(len(name) for name in BUILTINS) + 2
    return DispatchResult.lines(
        f"{entry.name:<{width}}{entry.help_text}" for entry in BUILTINS.values()
    )
