import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from hero_inventory.player.player import Player  # noqa: E402
from hero_inventory.ui.console import Console  # noqa: E402


class ScriptedConsole(Console):
    """Console fed from a list of answers; records everything written."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.output = []
        self.prompts = []
        super().__init__(input_fn=self._next_answer, output_fn=self.output.append)

    def _next_answer(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    @property
    def text(self):
        return "\n".join(self.output)


@pytest.fixture()
def player():
    return Player(name="Hero")


@pytest.fixture()
def scripted_console():
    return ScriptedConsole
