"""
Asking the user for missing values

Decision logic (whether to ask) lives with the callers; this module only
knows how to get an answer.
"""
from collections import deque
from typing import Iterable, Protocol

from ..core.errors import InputClosed


class Prompter(Protocol):
    def ask(self, text: str) -> str:
        ...


class ConsolePrompter:
    """Reads answers from stdin"""

    def ask(self, text: str) -> str:
        try:
            return input(f"{text} ")
        except EOFError as e:
            raise InputClosed(f"Input closed while waiting for: {text}") from e


class ScriptedPrompter:
    """Replays a fixed list of answers and records the questions"""

    def __init__(self, answers: Iterable[str]):
        self.answers = deque(answers)
        self.questions = []

    def ask(self, text: str) -> str:
        self.questions.append(text)
        if not self.answers:
            raise InputClosed(f"No scripted answer left for: {text}")
        return self.answers.popleft()


def ask_yes_no(prompter: Prompter, text: str) -> bool:
    """Ask until the answer is y or n"""
    while True:
        answer = prompter.ask(text).strip()
        if answer in ("y", "Y"):
            return True
        if answer in ("n", "N"):
            return False
