"""Searching a book catalog and listing the courses of students."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass

_FIELDS = ("1", "2", "3", "4", "5")


@dataclass(frozen=True)
class Book:
    """A catalog entry; ``keywords`` holds the single-word key words."""

    book_id: str
    title: str
    author: str
    keywords: tuple[str, ...]
    publisher: str
    year: str


class Library:
    """Books indexed by title, author, key word, publisher and year."""

    def __init__(self, books: Iterable[Book] = ()) -> None:
        self._index: dict[str, defaultdict[str, list[str]]] = {
            field: defaultdict(list) for field in _FIELDS
        }
        for book in books:
            self.add(book)

    def add(self, book: Book) -> None:
        """Index ``book`` under each of its searchable fields."""
        self._index["1"][book.title].append(book.book_id)
        self._index["2"][book.author].append(book.book_id)
        for keyword in book.keywords:
            self._index["3"][keyword].append(book.book_id)
        self._index["4"][book.publisher].append(book.book_id)
        self._index["5"][book.year].append(book.book_id)

    def query(self, condition: str) -> list[str]:
        """Answer ``N: text`` where N is 1 title, 2 author, 3 key word,
        4 publisher or 5 year; returns the matching ids in order, empty when
        nothing is found.
        """
        field = condition[:1]
        if field not in self._index:
            raise ValueError(f"unknown query {condition!r}")
        return sorted(self._index[field].get(condition[3:], []))


def course_lists(
    enrollments: Iterable[tuple[int, Iterable[str]]],
    queries: Iterable[str],
) -> list[tuple[str, list[int]]]:
    """Return each queried student with the sorted courses they registered for.

    Each enrollment is ``(course, student_names)``.
    """
    courses: defaultdict[str, set[int]] = defaultdict(set)
    for course, students in enrollments:
        for student in students:
            courses[student].add(course)
    return [(name, sorted(courses.get(name, ()))) for name in queries]