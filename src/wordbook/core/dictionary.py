"""
Named dictionary mapping words/phrases to definitions.

Keys are case-sensitive: "Cat" and "cat" are different entries.
"""

import re
from dataclasses import dataclass
from datetime import datetime

from wordbook.core.definition import Definition
from wordbook.core.errors import NotFound


@dataclass(frozen=True)
class SearchResult:
    line: str   # "word:\tdefinition"
    score: int  # number of pattern matches in line


class Dictionary:
    def __init__(self, name: str):
        if not name:
            raise ValueError("Dictionary name must not be empty")
        self._name = name
        self.entries: dict[str, Definition] = {}

    @property
    def name(self) -> str:
        return self._name

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, word: str) -> bool:
        return word in self.entries

    def __eq__(self, other) -> bool:
        if not isinstance(other, Dictionary):
            return NotImplemented
        return self._name == other._name and self.entries == other.entries

    def __repr__(self) -> str:
        return f"Dictionary(name={self._name!r}, entries={len(self.entries)})"

    # === Mutation ===

    def weak_define(self, word: str, definition: Definition) -> bool:
        """Add only if absent. True if added."""
        if word in self.entries:
            return False
        self.entries[word] = definition
        return True

    def strong_define(self, word: str, definition: Definition) -> bool:
        """Add or overwrite. True if a definition already existed."""
        existed = word in self.entries
        self.entries[word] = definition
        return existed

    def remove(self, word: str) -> bool:
        return self.entries.pop(word, None) is not None

    def change_entry_date(self, word: str, new_date: datetime) -> datetime:
        definition = self.entries.get(word)
        if definition is None:
            raise NotFound(word)
        return definition.change_date(new_date)

    # === Reading ===

    def lookup(self, word: str) -> Definition | None:
        return self.entries.get(word)

    def sorted_words(self) -> list[str]:
        """Words in case-insensitive alphabetical order."""
        return sorted(self.entries, key=str.lower)

    def date_sorted_words(self) -> list[str]:
        """Words by ascending entry date, ties broken by word."""
        return sorted(self.entries, key=lambda w: (self.entries[w].entry_date, w))

    def definition_line(self, word: str) -> str:
        """Render "word:\\tdefinition". Reads the definition."""
        definition = self.entries.get(word)
        if definition is None:
            raise NotFound(word)
        return f"{word}:\t{definition.read()}"

    def search_all(self, pattern: str | re.Pattern) -> list[SearchResult]:
        """
        Score every entry against a regular expression.

        Returns one result per entry, including entries that do not match.
        Raises re.error for an invalid pattern.
        """
        regex = re.compile(pattern) if isinstance(pattern, str) else pattern

        results = []
        for word in self.entries:
            line = self.definition_line(word)
            score = sum(1 for _ in regex.finditer(line))
            results.append(SearchResult(line, score))
        return results

    def render(self) -> str:
        lines = [self._name, ""]
        for word in self.sorted_words():
            lines.append(self.definition_line(word))
        return "\n".join(lines)

    # === Persistence ===

    def to_dict(self) -> dict:
        return {
            "name": self._name,
            "definitions": {word: d.to_dict() for word, d in self.entries.items()},
        }

    def save(self, path) -> None:
        from wordbook.core.storage import save_dictionary
        save_dictionary(self, path)

    @classmethod
    def load(cls, path) -> "Dictionary":
        from wordbook.core.storage import load_dictionary
        return load_dictionary(path)
