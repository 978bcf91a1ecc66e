"""Line sources feeding the shell loop.

Two implementations of the LineSource protocol:

- PromptLineSource: interactive editing, history and tab completion via
  prompt-toolkit.
- StreamLineSource: plain reads from a text stream, for piped or scripted
  input where no prompt should be shown.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from typing import TextIO

from prompt_toolkit import PromptSession
from prompt_toolkit import prompt as confirm_prompt
from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document
from prompt_toolkit.enums import EditingMode
from prompt_toolkit.history import FileHistory, History, InMemoryHistory
from prompt_toolkit.shortcuts import CompleteStyle

from treeshell.config.schema import ShellConfig
from treeshell.core.interfaces import CompletionCallback, EditMode
from treeshell.core.tokens import ends_with_separator, split_line

logger = logging.getLogger(__name__)

COMPLETE_STYLES: dict[str, CompleteStyle] = {
    "column": CompleteStyle.COLUMN,
    "multi_column": CompleteStyle.MULTI_COLUMN,
    "readline": CompleteStyle.READLINE_LIKE,
}

CONFIRM_EXIT_PROMPT = "Do you really want to quit? [y/N] "


class TreeCompleter(Completer):
    """prompt-toolkit completer backed by a completion callback.

    The callback receives the text before the cursor; each candidate
    replaces the partial word being typed.
    """

    def __init__(self, callback: CompletionCallback) -> None:
        self._callback = callback

    def get_completions(
        self, document: Document, complete_event: CompleteEvent
    ) -> Iterable[Completion]:
        text = document.text_before_cursor
        tokens = split_line(text)
        partial = "" if not tokens or ends_with_separator(text) else tokens[-1]
        for candidate in self._callback(text):
            yield Completion(candidate, start_position=-len(partial))


class PromptLineSource:
    """Interactive line source using a prompt-toolkit PromptSession.

    End of input (Ctrl+D) ends the shell. An interrupt (Ctrl+C) asks for
    confirmation when confirm_exit is set, otherwise it ends the shell too.
    """

    def __init__(
        self,
        config: ShellConfig | None = None,
        session: PromptSession[str] | None = None,
    ) -> None:
        """Initialize the line source.

        Args:
            config: Shell configuration. Defaults are used if None.
            session: Prebuilt session, mainly for tests. Built from config
                when None.
        """
        self._config = config or ShellConfig()
        self._session = session or PromptSession(
            history=self._make_history(),
            complete_style=COMPLETE_STYLES[self._config.complete_style],
            editing_mode=_to_editing_mode(self._config.edit_mode),
        )

    def _make_history(self) -> History:
        if self._config.history_file:
            logger.debug("Using history file: %s", self._config.history_file)
            return FileHistory(self._config.history_file)
        return InMemoryHistory()

    @property
    def session(self) -> PromptSession[str]:
        return self._session

    def register_completer(self, completer: CompletionCallback) -> None:
        self._session.completer = TreeCompleter(completer)

    def next_line(self) -> str | None:
        try:
            return self._session.prompt(self._config.prompt)
        except EOFError:
            return None
        except KeyboardInterrupt:
            return self._confirm_exit()

    def _confirm_exit(self) -> str | None:
        """Ask whether to quit after an interrupt.

        Returns:
            None to end input, or an empty line to keep going.
        """
        if not self._config.confirm_exit:
            return None
        try:
            answer = confirm_prompt(CONFIRM_EXIT_PROMPT)
        except (EOFError, KeyboardInterrupt):
            return None
        if answer.strip().lower() in ("y", "yes"):
            return None
        return ""

    @property
    def edit_mode(self) -> EditMode:
        return "vi" if self._session.editing_mode == EditingMode.VI else "emacs"

    def set_edit_mode(self, mode: EditMode) -> None:
        self._session.editing_mode = _to_editing_mode(mode)
        logger.debug("Edit mode set to %s", mode)


class StreamLineSource:
    """Non-interactive line source reading from a text stream.

    No prompt is printed and completion is never requested, but the
    completer is kept so callers can inspect it.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdin
        self.completer: CompletionCallback | None = None

    def register_completer(self, completer: CompletionCallback) -> None:
        self.completer = completer

    def next_line(self) -> str | None:
        line = self._stream.readline()
        if not line:
            return None
        return line.rstrip("\r\n")


def _to_editing_mode(mode: EditMode) -> EditingMode:
    return EditingMode.VI if mode == "vi" else EditingMode.EMACS
