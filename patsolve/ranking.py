"""Ranking puzzles: best subject ranks, merged test rankings, sorting and rich lists."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

_SUBJECTS = "ACME"
_MAX_PER_AGE = 100


def _first_positions(scores: Iterable[float]) -> dict[float, int]:
    """Map each score to its rank when ordered from highest; ties share a rank."""
    positions: dict[float, int] = {}
    for position, score in enumerate(sorted(scores, reverse=True), start=1):
        positions.setdefault(score, position)
    return positions


def best_ranks(
    students: Iterable[tuple[str, float, float, float]],
    queries: Iterable[str],
) -> list[str]:
    """Report each queried student's best rank and the subject it was earned in.

    Each student is ``(id, c_grade, math_grade, english_grade)``.  Subjects are
    tried in the order average (A), C, mathematics (M), English (E); an equal
    rank in a later subject does not replace an earlier one.  Unknown students
    get ``N/A``.
    """
    table = {
        student_id: ((c + m + e) / 3, c, m, e)
        for student_id, c, m, e in students
    }
    best: dict[str, tuple[int, str]] = {}
    for column, letter in enumerate(_SUBJECTS):
        positions = _first_positions(scores[column] for scores in table.values())
        for student_id, scores in table.items():
            rank = positions[scores[column]]
            if student_id not in best or best[student_id][0] > rank:
                best[student_id] = (rank, letter)
    results = []
    for student_id in queries:
        if student_id in best:
            rank, letter = best[student_id]
            results.append(f"{rank} {letter}")
        else:
            results.append("N/A")
    return results


def _competition_ranks(scores: Sequence[int]) -> list[int]:
    ranks = []
    rank = 0
    for position, score in enumerate(scores, start=1):
        if position == 1 or score != scores[position - 2]:
            rank = position
        ranks.append(rank)
    return ranks


def pat_ranking(
    locations: Sequence[Sequence[tuple[str, int]]],
) -> list[tuple[str, int, int, int]]:
    """Merge the rank lists of several test locations.

    Each location is a sequence of ``(registration_number, score)``; locations
    are numbered from 1.  Returns ``(registration_number, final_rank,
    location_number, local_rank)`` ordered by score descending, then by
    registration number.
    """
    entries: list[tuple[int, str, int, int]] = []
    for location_number, testees in enumerate(locations, start=1):
        ordered = sorted(testees, key=lambda testee: (-testee[1], testee[0]))
        local = _competition_ranks([score for _, score in ordered])
        entries.extend(
            (score, registration, location_number, rank)
            for (registration, score), rank in zip(ordered, local)
        )
    entries.sort(key=lambda entry: (-entry[0], entry[1]))
    finals = _competition_ranks([entry[0] for entry in entries])
    return [
        (registration, final, location_number, local_rank)
        for (_, registration, location_number, local_rank), final in zip(entries, finals)
    ]


def sort_records(
    records: Iterable[tuple[str, str, int]], column: int
) -> list[tuple[str, str, int]]:
    """Sort ``(id, name, grade)`` records by column 1, 2 or 3.

    Names and grades are sorted in increasing order with ties broken by id.
    """
    keys = {
        1: lambda record: record[0],
        2: lambda record: (record[1], record[0]),
        3: lambda record: (record[2], record[0]),
    }
    if column not in keys:
        raise ValueError(f"column must be 1, 2 or 3, not {column}")
    return sorted(records, key=keys[column])


def richest(
    people: Iterable[tuple[str, int, int]],
    queries: Iterable[tuple[int, int, int]],
) -> list[list[tuple[str, int, int]]]:
    """Answer ``(max_output, min_age, max_age)`` queries over ``(name, age, worth)``.

    People are listed by worth descending, then age ascending, then name.
    An empty answer stands for ``None``.
    """
    ordered = sorted(people, key=lambda person: (-person[2], person[1], person[0]))
    per_age: Counter[int] = Counter()
    candidates = []
    for person in ordered:
        per_age[person[1]] += 1
        if per_age[person[1]] <= _MAX_PER_AGE:
            candidates.append(person)
    answers = []
    for max_output, min_age, max_age in queries:
        answer: list[tuple[str, int, int]] = []
        for person in candidates:
            if len(answer) >= max_output:
                break
            if min_age <= person[1] <= max_age:
                answer.append(person)
        answers.append(answer)
    return answers