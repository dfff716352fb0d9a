from typing import Iterable, List


class ScriptedRandomSource:
    """Deterministic RandomSource: replays queued answers, then falls back to 0 / False."""

    def __init__(self, choices: Iterable[int] = (), chances: Iterable[bool] = ()):
        self.choices: List[int] = list(choices)
        self.chances: List[bool] = list(chances)
        self.choice_calls: List[int] = []

    def choice(self, k: int) -> int:
        self.choice_calls.append(k)
        idx = self.choices.pop(0) if self.choices else 0
        assert 0 <= idx < k, f"scripted choice {idx} out of range for k={k}"
        return idx

    def chance(self, p: float) -> bool:
        return self.chances.pop(0) if self.chances else False


def empty_grid():
    return [[0] * 4 for _ in range(4)]
