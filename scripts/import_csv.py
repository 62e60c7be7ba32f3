# scripts/import_csv.py
"""Build a dictionary file from a CSV of word,date,definition rows.

Dates use the MM:dd:yyyy:HH:mm argument format. Existing words are kept
(weak define), so duplicate rows after the first are reported and skipped.
"""

import sys

import pandas as pd

from wordbook.core.dates import parse_date_arg
from wordbook.core.definition import Definition
from wordbook.core.dictionary import Dictionary
from wordbook.core.errors import InvalidDate


def main():
    if len(sys.argv) < 4:
        print('Usage: python import_csv.py words.csv "Dictionary Name" out.dict')
        return

    csv_path, name, out_path = sys.argv[1:4]
    df = pd.read_csv(csv_path, dtype=str, keep_default_na=False)

    missing = {"word", "date", "definition"} - set(df.columns)
    if missing:
        print(f"✗ Missing columns: {', '.join(sorted(missing))}")
        sys.exit(1)

    dictionary = Dictionary(name)
    for row in df.itertuples(index=False):
        try:
            entry_date = parse_date_arg(row.date)
        except InvalidDate as e:
            print(f"✗ {row.word}: {e}")
            continue
        if not dictionary.weak_define(row.word, Definition(row.definition, entry_date)):
            print(f"○ {row.word}: duplicate, skipped")

    dictionary.save(out_path)
    print(f"Saved {len(dictionary)} definitions to {out_path}")


if __name__ == "__main__":
    main()
