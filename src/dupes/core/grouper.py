"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/grouper.py
Size and digest grouping. Results are always returned in sorted order so the
report does not depend on filesystem enumeration order.
"""

from typing import Dict, Iterable, Iterator, List, Set, Tuple, Callable, Any
from collections import defaultdict
import logging

from dupes.core.models import FileEntry

logger = logging.getLogger(__name__)


class SizeIndex:
    """
    Maps an exact byte length to the set of paths having it.
    One group per distinct size; iteration is ascending by size.
    """

    def __init__(self):
        self._groups: Dict[int, Set[str]] = defaultdict(set)

    @classmethod
    def build(cls, entries: Iterable[FileEntry], min_size: int = 0) -> "SizeIndex":
        """
        Index entries by size, dropping those strictly smaller than min_size.
        """
        index = cls()
        skipped = 0
        for entry in entries:
            if entry.size < min_size:
                skipped += 1
                continue
            index.add(entry)

        if skipped:
            logger.debug(f"Ignored {skipped} files smaller than {min_size} bytes")
        logger.debug(f"Indexed {index.file_count} files in {len(index)} size groups")
        return index

    def add(self, entry: FileEntry) -> None:
        self._groups[entry.size].add(entry.path)

    def groups(self) -> Iterator[Tuple[int, List[str]]]:
        """Yield (size, sorted paths) ascending by size."""
        for size in sorted(self._groups):
            yield size, sorted(self._groups[size])

    @property
    def file_count(self) -> int:
        return sum(len(paths) for paths in self._groups.values())

    def __getitem__(self, size: int) -> List[str]:
        if size not in self._groups:
            raise KeyError(size)
        return sorted(self._groups[size])

    def __contains__(self, size: int) -> bool:
        return size in self._groups

    def __len__(self) -> int:
        return len(self._groups)

    def __repr__(self):
        return f"<SizeIndex groups={len(self)}, files={self.file_count}>"


def group_by(paths: Iterable[str], key_func: Callable[[str], Any]) -> List[Tuple[Any, List[str]]]:
    """
    Group paths by a computed key.
    Returns (key, sorted paths) pairs ascending by key.
    """
    groups = defaultdict(list)
    for path in paths:
        groups[key_func(path)].append(path)
    return [(key, sorted(groups[key])) for key in sorted(groups)]
