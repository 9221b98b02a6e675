"""Default fuzzy scorer used as the picker's match capability.

Substring hits rank ahead of scattered subsequence hits, and both kinds are
kept. Substring hits order by position then length; subsequence hits by score.
"""

from __future__ import annotations

from collections.abc import Sequence

SUBSTRING_BASE_SCORE = 10_000
WORD_BOUNDARY_CHARS = "/_- ."


def _fuzzy_score(query: str, candidate: str) -> int | None:
    if not query:
        return 0
    query_folded = query.casefold()
    candidate_folded = candidate.casefold()

    score = 0
    prev_idx = -1
    run = 0
    for needle in query_folded:
        idx = candidate_folded.find(needle, prev_idx + 1)
        if idx < 0:
            return None
        if idx == prev_idx + 1:
            run += 1
            score += 20 + min(16, run * 4)
        else:
            gap = idx - prev_idx - 1
            run = 0
            score -= min(40, gap * 2)
        if idx == 0 or candidate_folded[idx - 1] in WORD_BOUNDARY_CHARS:
            score += 35
        prev_idx = idx

    score -= len(candidate_folded) // 5
    return score


def _substring_index(query: str, candidate: str) -> int | None:
    if not query:
        return 0
    idx = candidate.casefold().find(query.casefold())
    if idx < 0:
        return None
    return idx


def fuzzy_match_labels(query: str, labels: Sequence[str], limit: int = 200) -> list[tuple[int, str, int]]:
    """Rank ``labels`` against ``query`` as ``(label_index, label, score)`` rows.

    Substring hits come first, ordered by match position, then length, then
    label. Labels that only match as a scattered subsequence follow, ordered
    by descending fuzzy score. Each label appears at most once.
    """
    substring_scored: list[tuple[int, int, str, int]] = []
    subsequence_scored: list[tuple[int, int, str, int]] = []
    for idx, label in enumerate(labels):
        substr_idx = _substring_index(query, label)
        if substr_idx is not None:
            substring_scored.append((substr_idx, len(label), label, idx))
            continue
        score = _fuzzy_score(query, label)
        if score is not None:
            subsequence_scored.append((score, len(label), label, idx))

    substring_scored.sort(key=lambda item: (item[0], item[1], item[2]))
    subsequence_scored.sort(key=lambda item: (-item[0], item[1], item[2]))
    ranked = [
        (label_idx, label, SUBSTRING_BASE_SCORE - (substr_idx * 50) - label_len)
        for substr_idx, label_len, label, label_idx in substring_scored
    ]
    # Subsequence scores stay well below SUBSTRING_BASE_SCORE.
    ranked.extend((idx, label, score) for score, _, label, idx in subsequence_scored)
    return ranked[: max(1, limit)]


def match_labels(candidates: Sequence[str], query: str) -> list[str]:
    """Matcher-contract wrapper: matching candidates in relevance order."""
    if not candidates:
        return []
    return [label for _, label, _ in fuzzy_match_labels(query, candidates, limit=len(candidates))]


__all__ = [
    "fuzzy_match_labels",
    "match_labels",
]
