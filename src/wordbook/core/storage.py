"""
Dictionary file persistence.

Files are UTF-8 JSON:

    {
      "format": "wordbook.dictionary",
      "version": 1,
      "name": "...",
      "definitions": {
        "word": {"text": "...", "entry_date": "2020-01-01T00:00:00", "access_count": 0}
      }
    }
"""

import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, NaiveDatetime, ValidationError

from wordbook.config import FILE_FORMAT, FILE_VERSION
from wordbook.core.definition import Definition
from wordbook.core.dictionary import Dictionary
from wordbook.core.errors import FormatError
from wordbook.logs import get_logger


logger = get_logger(__name__)


class DefinitionRecord(BaseModel):
    text: str
    entry_date: NaiveDatetime  # local time, no UTC offset
    access_count: int = Field(default=0, ge=0)


class DictionaryFile(BaseModel):
    format: Literal["wordbook.dictionary"]
    version: Literal[1]
    name: str = Field(min_length=1)
    definitions: dict[str, DefinitionRecord] = Field(default_factory=dict)


def dump_dictionary(dictionary: Dictionary) -> str:
    data = {"format": FILE_FORMAT, "version": FILE_VERSION, **dictionary.to_dict()}
    return json.dumps(data, indent=2, ensure_ascii=False)


def parse_dictionary(text: str) -> Dictionary:
    """Build a Dictionary from file contents. Raises FormatError."""
    try:
        record = DictionaryFile.model_validate_json(text)
    except ValidationError as e:
        raise FormatError(f"Not a valid dictionary file: {e.error_count()} problem(s)") from e

    dictionary = Dictionary(record.name)
    for word, d in record.definitions.items():
        dictionary.entries[word] = Definition(d.text, d.entry_date, d.access_count)
    return dictionary


def save_dictionary(dictionary: Dictionary, path) -> None:
    """Write the dictionary to path. Raises OSError on I/O problems."""
    path = Path(path)
    path.write_text(dump_dictionary(dictionary), encoding="utf-8")
    logger.info(f"Saved {dictionary.name!r} ({len(dictionary)} definitions) to {path}")


def load_dictionary(path) -> Dictionary:
    """Read a dictionary from path. Raises OSError or FormatError."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise FormatError(f"Not a UTF-8 text file: {path}") from e

    dictionary = parse_dictionary(text)
    logger.info(f"Loaded {dictionary.name!r} ({len(dictionary)} definitions) from {path}")
    return dictionary
