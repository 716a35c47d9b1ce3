from bentfour.utils import Symbol

A = Symbol.A
B = Symbol.B


def play(board, moves):
    """Apply (column, symbol) moves to a board and return it."""
    for column, symbol in moves:
        board.insert(column, symbol)
    return board


class ScriptedPrompt:
    """Stands in for input(), answering from a fixed list."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.questions = []

    def __call__(self, text):
        self.questions.append(text)
        if not self.answers:
            raise EOFError("no more scripted answers")
        return self.answers.pop(0)


class Recorder:
    """Stands in for print(), keeping every displayed text."""

    def __init__(self):
        self.lines = []

    def __call__(self, text):
        self.lines.append(text)

    @property
    def text(self):
        return "\n".join(self.lines)
