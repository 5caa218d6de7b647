"""Task id helpers for the command line."""

from __future__ import annotations

from collections.abc import Iterable

from tasklist_cli.errors import AmbiguousTaskIdError, TaskNotFoundError


def calculate_unique_suffixes(task_ids: list[str]) -> dict[str, int]:
    """
    Calculate minimum unique suffix length for each task ID.

    Starts from length 1 and grows until unique among all IDs.

    Args:
        task_ids: List of full task IDs

    Returns:
        Dict mapping task_id -> required suffix length
    """
    result = {}

    for task_id in task_ids:
        for length in range(1, len(task_id) + 1):
            suffix = task_id[-length:]
            conflicts = [
                tid for tid in task_ids if tid != task_id and tid.endswith(suffix)
            ]
            if not conflicts:
                result[task_id] = length
                break
        else:
            result[task_id] = len(task_id)

    return result


def short_ids(task_ids: list[str]) -> dict[str, str]:
    """Map every task id to its shortest unique suffix."""
    lengths = calculate_unique_suffixes(task_ids)
    return {tid: tid[-length:] for tid, length in lengths.items()}


def resolve_task_id(task_ids: Iterable[str], id_or_suffix: str) -> str:
    """
    Resolve a task ID or suffix to a full task ID.

    Args:
        task_ids: All task IDs currently in the list
        id_or_suffix: Full task ID or a suffix of one

    Returns:
        The full task ID

    Raises:
        TaskNotFoundError: No task ends with the given suffix
        AmbiguousTaskIdError: More than one task ends with it
    """
    fragment = id_or_suffix.strip()
    ids = list(task_ids)
    if fragment in ids:
        return fragment

    matches = [tid for tid in ids if fragment and tid.endswith(fragment)]
    if not matches:
        raise TaskNotFoundError(fragment)
    if len(matches) > 1:
        raise AmbiguousTaskIdError(fragment, matches)
    return matches[0]
