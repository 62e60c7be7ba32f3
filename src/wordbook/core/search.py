"""
Search relevance ordering.
"""

from wordbook.core.dictionary import SearchResult


def order_results(results: list[SearchResult]) -> list[SearchResult]:
    """Ascending by score; equal scores in descending line order."""
    by_line = sorted(results, key=lambda r: r.line, reverse=True)
    return sorted(by_line, key=lambda r: r.score)


def relevant_results(results: list[SearchResult]) -> list[SearchResult]:
    """
    The positive-score tail of the ordered results, highest score first.

    Scanning down from the top score, stop at the first zero.
    """
    relevant = []
    for result in reversed(order_results(results)):
        if result.score <= 0:
            break
        relevant.append(result)
    return relevant


def format_results(results: list[SearchResult]) -> str:
    return "\n".join(f"[{r.score}] {r.line}" for r in results)
