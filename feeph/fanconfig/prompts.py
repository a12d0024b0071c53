#!/usr/bin/env python3
"""
user interaction during discovery

The discovery code only depends on the abstract 'Prompter' interface.
'ConsolePrompter' talks to the user on stdin/stdout, 'ScriptedPrompter'
replays prepared answers (useful for unattended runs and tests).
"""

import logging
from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Iterable

LH = logging.getLogger('feeph.fanconfig')


class Prompter(ABC):

    @abstractmethod
    def confirm(self, prompt: str, default: bool = True) -> bool:
        ...

    @abstractmethod
    def read_text(self, prompt: str) -> str:
        ...

    @abstractmethod
    def read_number(self, prompt: str, default: float | None = None) -> float:
        ...

    @abstractmethod
    def multi_select(self, prompt: str, options: list[str]) -> set[int]:
        """
        returns the indices of the selected options (may be empty)
        """
        ...


class ConsolePrompter(Prompter):

    def confirm(self, prompt: str, default: bool = True) -> bool:
        if default:
            hint = "[Y/n]"
        else:
            hint = "[y/N]"
        while True:
            answer = input(f"{prompt} {hint} ").strip().lower()
            if answer == '':
                return default
            if answer in ('y', 'yes'):
                return True
            if answer in ('n', 'no'):
                return False
            print("Please answer 'y' or 'n'.")

    def read_text(self, prompt: str) -> str:
        return input(f"{prompt}: ").strip()

    def read_number(self, prompt: str, default: float | None = None) -> float:
        """
        ask for a number until the answer can be parsed

        an empty answer selects the default value (if there is one)
        """
        if default is not None:
            prompt = f"{prompt} [{default}]"
        while True:
            answer = input(f"{prompt}: ").strip()
            if answer == '' and default is not None:
                return float(default)
            try:
                return float(answer)
            except ValueError:
                print(f"'{answer}' is not a number. Please try again.")

    def multi_select(self, prompt: str, options: list[str]) -> set[int]:
        for number, option in enumerate(options, start=1):
            print(f"  {number:2d}) {option}")
        while True:
            answer = input(f"{prompt} (comma-separated numbers): ").strip()
            try:
                return _parse_selection(answer, len(options))
            except ValueError as e:
                print(f"{e} Please try again.")


def _parse_selection(answer: str, count: int) -> set[int]:
    """
    convert '1, 3' into {0, 2}
    """
    selection = set()
    for token in answer.replace(' ', ',').split(','):
        if token == '':
            continue
        try:
            number = int(token)
        except ValueError:
            raise ValueError(f"'{token}' is not a number.")
        if 1 <= number <= count:
            selection.add(number - 1)
        else:
            raise ValueError(f"{number} is out of range (1 ≤ x ≤ {count}).")
    return selection


class ScriptedPrompter(Prompter):
    """
    answer prompts from a prepared list of answers

    Each answer is consumed by the next prompt, regardless of its type.
    Running out of answers raises an EOFError (just like 'input()' does
    when stdin is exhausted). The asked prompts are recorded in 'prompts'.
    """

    def __init__(self, answers: Iterable[Any]):
        self._answers = deque(answers)
        self.prompts: list[str] = list()

    def _next(self, prompt: str) -> Any:
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError(f"no answer left for prompt '{prompt}'")
        answer = self._answers.popleft()
        LH.debug("%s -> %r", prompt, answer)
        return answer

    def confirm(self, prompt: str, default: bool = True) -> bool:
        return bool(self._next(prompt))

    def read_text(self, prompt: str) -> str:
        return str(self._next(prompt))

    def read_number(self, prompt: str, default: float | None = None) -> float:
        answer = self._next(prompt)
        if answer is None and default is not None:
            return float(default)
        return float(answer)

    def multi_select(self, prompt: str, options: list[str]) -> set[int]:
        return set(self._next(prompt))

    def remaining(self) -> int:
        return len(self._answers)
