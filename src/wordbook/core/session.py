"""
Session state shared by command handlers.
"""

from dataclasses import dataclass

from wordbook.core.dictionary import Dictionary
from wordbook.core.errors import NoOpenDictionary
from wordbook.stats.statistics import Statistics


@dataclass
class Session:
    dictionary: Dictionary | None = None
    path: str | None = None               # last path opened or saved to
    printout: str | None = None           # cached `print` output
    statistics: Statistics | None = None  # cached `printstats` snapshot
    dates_enabled: bool = False

    def require_dictionary(self) -> Dictionary:
        if self.dictionary is None:
            raise NoOpenDictionary()
        return self.dictionary

    def replace_dictionary(self, dictionary: Dictionary | None) -> None:
        """Swap the open dictionary. Cached views belong to the old one."""
        self.dictionary = dictionary
        self.printout = None
        self.statistics = None
