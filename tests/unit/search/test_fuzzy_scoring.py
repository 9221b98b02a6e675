"""Tests for the default label scorer used as the match capability."""

from __future__ import annotations

import unittest

from fuzzypick.search import fuzzy_match_labels, match_labels


def _labels(rows: list[tuple[int, str, int]]) -> list[str]:
    return [label for _, label, _ in rows]


class FuzzyMatchLabelsTests(unittest.TestCase):
    def test_substring_hits_rank_by_position_then_length(self) -> None:
        matched = fuzzy_match_labels("alp", ["xalpha", "alpha.py", "alp"])

        self.assertEqual(_labels(matched), ["alp", "alpha.py", "xalpha"])
        self.assertEqual([idx for idx, _, _ in matched], [2, 1, 0])

    def test_subsequence_hits_follow_substring_hits(self) -> None:
        matched = fuzzy_match_labels("alp", ["xalpha", "a_l_p", "alpha.py", "alp"])

        self.assertEqual(_labels(matched), ["alp", "alpha.py", "xalpha", "a_l_p"])
        self.assertEqual([idx for idx, _, _ in matched], [3, 2, 0, 1])
        scores = [score for _, _, score in matched]
        self.assertEqual(scores, sorted(scores, reverse=True))

    def test_subsequence_hits_prefer_contiguous_runs(self) -> None:
        matched = fuzzy_match_labels("mn", ["m_x_x_x_x_xn.py", "readme.md", "main.py"])

        self.assertEqual(_labels(matched), ["main.py", "m_x_x_x_x_xn.py"])

    def test_matching_is_case_insensitive(self) -> None:
        self.assertEqual(_labels(fuzzy_match_labels("READ", ["readme.md", "x"])), ["readme.md"])
        self.assertEqual(_labels(fuzzy_match_labels("rdm", ["README.md"])), ["README.md"])

    def test_respects_limit(self) -> None:
        labels = [f"file{idx}.txt" for idx in range(10)]
        self.assertEqual(len(fuzzy_match_labels("file", labels, limit=3)), 3)


class MatchLabelsTests(unittest.TestCase):
    def test_returns_matching_candidates_only(self) -> None:
        candidates = ["../", "src/", "setup.py", "README.md"]

        matched = match_labels(candidates, "s")

        self.assertEqual(set(matched), {"src/", "setup.py"})

    def test_mixed_list_keeps_substring_and_scattered_hits(self) -> None:
        matched = match_labels(["../", "m_a_i_n.txt", "main.py"], "mai")

        self.assertEqual(matched, ["main.py", "m_a_i_n.txt"])

    def test_each_candidate_returned_once(self) -> None:
        matched = match_labels(["main.py", "mail/", "m_a_i.txt"], "ma")

        self.assertEqual(sorted(matched), ["m_a_i.txt", "mail/", "main.py"])
        self.assertEqual(matched[-1], "m_a_i.txt")

    def test_no_limit_truncation(self) -> None:
        candidates = [f"note{idx}.md" for idx in range(500)]
        self.assertEqual(len(match_labels(candidates, "note")), 500)

    def test_no_match_returns_empty(self) -> None:
        self.assertEqual(match_labels(["../", "a.txt"], "xyz"), [])

    def test_empty_candidates(self) -> None:
        self.assertEqual(match_labels([], "x"), [])


if __name__ == "__main__":
    unittest.main()
