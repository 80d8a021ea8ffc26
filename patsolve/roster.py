"""Small record-keeping puzzles: sign-in logs, account fixes, grade lists."""

from __future__ import annotations

from collections.abc import Iterable

_CONFUSING = str.maketrans({"1": "@", "0": "%", "l": "L", "O": "o"})


def first_and_last(records: Iterable[tuple[str, str, str]]) -> tuple[str, str]:
    """Return who signed in first and who signed out last.

    Each record is ``(id, sign_in, sign_out)`` with ``HH:MM:SS`` times.
    """
    records = list(records)
    if not records:
        raise ValueError("no sign-in records")
    first = min(records, key=lambda record: record[1])
    last = max(records, key=lambda record: record[2])
    return first[0], last[0]


def modify_password(password: str) -> str:
    """Replace the easily confused characters 1, 0, l and O."""
    return password.translate(_CONFUSING)


def modified_accounts_report(accounts: Iterable[tuple[str, str]]) -> list[str]:
    """Return the report lines for the accounts whose credential was changed."""
    accounts = list(accounts)
    modified = []
    for username, original in accounts:
        changed = modify_password(original)
        if changed != original:
            modified.append(f"{username} {changed}")
    if modified:
        return [str(len(modified))] + modified
    if len(accounts) == 1:
        return ["There is 1 account and no account is modified"]
    return [f"There are {len(accounts)} accounts and no account is modified"]


def boys_vs_girls(students: Iterable[tuple[str, str, str, int]]) -> list[str]:
    """Compare the best girl with the worst boy.

    Each student is ``(name, gender, id, grade)``; gender ``F`` marks a girl.
    """
    girl: tuple[str, str, int] | None = None
    boy: tuple[str, str, int] | None = None
    for name, gender, student_id, grade in students:
        if gender == "F":
            if girl is None or grade > girl[2]:
                girl = (name, student_id, grade)
        elif boy is None or grade < boy[2]:
            boy = (name, student_id, grade)
    lines = [
        "Absent" if girl is None else f"{girl[0]} {girl[1]}",
        "Absent" if boy is None else f"{boy[0]} {boy[1]}",
    ]
    if girl is None or boy is None:
        lines.append("NA")
    else:
        lines.append(str(girl[2] - boy[2]))
    return lines