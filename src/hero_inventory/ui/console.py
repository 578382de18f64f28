from __future__ import annotations

import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class Console:
    """Line-oriented console I/O with re-prompting input helpers.

    ``input_fn`` and ``output_fn`` default to the builtins and can be replaced
    (e.g. with a scripted iterator in tests). End of input propagates as
    ``EOFError``.
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self._input = input_fn
        self._output = output_fn

    def write(self, text: str = "") -> None:
        self._output(text)

    def ask(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def ask_text(self, prompt: str) -> str:
        """Prompt until a non-blank answer is given."""
        while True:
            answer = self.ask(prompt)
            if answer:
                return answer
            self.write("Please enter a value.")

    def ask_int(self, prompt: str, minimum: Optional[int] = None, maximum: Optional[int] = None) -> int:
        """Prompt until an integer within [minimum, maximum] is given (bounds optional)."""
        while True:
            answer = self.ask(prompt)
            try:
                value = int(answer)
            except ValueError:
                logger.debug("Rejected non-integer input %r", answer)
                self.write("Please enter a whole number.")
                continue
            if minimum is not None and value < minimum:
                self.write(f"Please enter a number >= {minimum}.")
                continue
            if maximum is not None and value > maximum:
                self.write(f"Please enter a number <= {maximum}.")
                continue
            return value


__all__ = ["Console"]
