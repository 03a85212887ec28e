from typing import Iterable

from logger import debug, error
from models.matches import Match

MAX_RESULTS = 10

class InvalidShape(ValueError):
    def __init__(self, row: int, expected: int, actual: int) -> None:
        self.row = row
        self.expected = expected
        self.actual = actual
        super().__init__(f'Row {row} has length {actual}, expected {expected}. All rows in the grid must have the same length.')

class SubstringIndex:
    """
    Counts every contiguous horizontal and vertical run of a character grid.
    Built once, then queried with find().
    """
    def __init__(self, rows: Iterable[str]) -> None:
        # Materialize so single-pass iterables are only consumed once
        self._rows = tuple(rows)
        if self._rows:
            expected = len(self._rows[0])
            for idx, row in enumerate(self._rows):
                if len(row) != expected:
                    error(f'Rejected grid: row {idx} has length {len(row)}, expected {expected}')
                    raise InvalidShape(idx, expected, len(row))

        self._frequency: dict[str, int] = {}
        for row in self._rows:
            self._count_runs(row)
        for column in self.columns:
            self._count_runs(column)
        debug(f'Indexed {len(self._frequency)} distinct runs from a {len(self._rows)}x{self.width} grid')

    def _count_runs(self, line: str) -> None:
        length = len(line)
        for start in range(length):
            for end in range(start + 1, length + 1):
                run = line[start:end]
                self._frequency[run] = self._frequency.get(run, 0) + 1

    @property
    def rows(self) -> tuple[str, ...]:
        return self._rows

    @property
    def width(self) -> int:
        return len(self._rows[0]) if self._rows else 0

    @property
    def columns(self) -> tuple[str, ...]:
        return tuple(''.join(row[col] for row in self._rows) for col in range(self.width))

    def frequency(self, word: str) -> int:
        return self._frequency.get(word, 0)

    def __contains__(self, word: str) -> bool:
        return word in self._frequency

    def __len__(self) -> int:
        return len(self._frequency)

    def matches(self, words: Iterable[str]) -> list[Match]:
        found = [Match(word=w, frequency=self._frequency[w]) for w in set(words) if w in self._frequency]
        # Most frequent first, ties broken alphabetically
        found.sort(key=lambda m: (-m.frequency, m.word))
        return found[:MAX_RESULTS]

    def find(self, words: Iterable[str]) -> list[str]:
        return [m.word for m in self.matches(words)]
