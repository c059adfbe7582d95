"""Locate the binary, source and manual page files for commands."""

from __future__ import annotations

import argparse
import glob
import os
import sys
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable

from whereloc.constants import BIN_DIRS, MAN_DIRS, SRC_DIRS

_COMPRESSION_SUFFIXES = (".Z", ".gz", ".xz", ".bz2", ".zst")


class DirType(Enum):
    """Kind of directory being searched."""

    BINARY = "binary"
    MANUAL = "manual"
    SOURCE = "source"
    UNKNOWN = "unknown"


@dataclass
class WhDir:
    """A search directory together with its stat information, if it exists."""

    path: Path
    dir_type: DirType
    stat: os.stat_result | None = field(default=None, compare=False, repr=False)

    @classmethod
    def create(cls, path, dir_type):
        """Build a WhDir, reading the directory's metadata if it is reachable."""
        path = Path(path)
        try:
            info = os.stat(path)
        except OSError:
            info = None
        return cls(path=path, dir_type=dir_type, stat=info)


class WhDirList:
    """Ordered collection of unique search directories."""

    def __init__(self) -> None:
        self.dirs: list[WhDir] = []
        self.seen_files: set[tuple[int, int]] = set()

    def __iter__(self):
        return iter(self.dirs)

    def __len__(self) -> int:
        return len(self.dirs)

    def construct_dir_list(self, dir_type, paths):
        """Add every path in ``paths``, expanding those with wildcards."""
        for path in paths:
            if "*" in str(path):
                self.add_sub_dirs(path, dir_type)
            else:
                self.add_dir(WhDir.create(path, dir_type))

    def add_dir(self, directory):
        """Add a directory unless its path or (device, inode) was already seen."""
        if any(d.path == directory.path for d in self.dirs):
            return
        if directory.stat is None:
            return
        key = (directory.stat.st_dev, directory.stat.st_ino)
        if key not in self.seen_files:
            self.seen_files.add(key)
            self.dirs.append(directory)

    def remove_dir(self, directory):
        """Remove every entry with the same path as ``directory``."""
        self.dirs = [d for d in self.dirs if d.path != directory.path]

    def add_sub_dirs(self, parent_dir, dir_type):
        """Expand a glob pattern and add the directories it matches."""
        for match in sorted(glob.glob(str(parent_dir))):
            if os.path.isdir(match):
                self.add_dir(WhDir.create(match, dir_type))

    def lookup(self, pattern, dir_type):
        """Return the files matching ``pattern`` in directories of ``dir_type``."""
        results: list[str] = []
        for directory in self.dirs:
            if directory.dir_type == dir_type:
                results.extend(find_in(directory.path, pattern, directory.dir_type))
        return results


def whereis_type_to_name(dir_type):
    """Short name of a directory type."""
    return {
        DirType.MANUAL: "man",
        DirType.BINARY: "bin",
        DirType.SOURCE: "src",
        DirType.UNKNOWN: "???",
    }[dir_type]


def _file_name(path) -> str | None:
    name = Path(path).name
    if name in ("", ".", ".."):
        return None
    return name


def filename_equal(cp, dp, dir_type):
    """Tell whether directory entry ``dp`` matches the searched name ``cp``."""
    name = _file_name(cp)
    if name is None:
        return False

    if dir_type == DirType.SOURCE and dp.startswith("s."):
        return filename_equal(cp, dp[2:], dir_type)

    if dir_type == DirType.MANUAL:
        for suffix in _COMPRESSION_SUFFIXES:
            if dp.endswith(suffix):
                dp = dp[: -len(suffix)]
                break

    if dp == name:
        return True
    return dir_type != DirType.BINARY and dp.startswith(name + ".")


def find_in(directory, pattern, dir_type):
    """List the entries of ``directory`` whose names match ``pattern``."""
    try:
        entries = list(os.scandir(directory))
    except OSError:
        return []
    return [
        str(Path(directory) / entry.name)
        for entry in entries
        if filename_equal(pattern, entry.name, dir_type)
    ]


@dataclass
class OutputOptions:
    """Which kinds of result to show."""

    search_bin: bool = False
    search_man: bool = False
    search_src: bool = False
    path_given: bool = False
    search_specific_bin: bool = False
    search_specific_man: bool = False
    search_specific_src: bool = False


def group_results(results):
    """Split result paths into binary, manual and source groups."""
    grouped: dict[DirType, list[str]] = {}
    for path in results:
        if "/bin/" in path:
            kind = DirType.BINARY
        elif "/man" in path or "/share/man" in path:
            kind = DirType.MANUAL
        else:
            kind = DirType.SOURCE
        grouped.setdefault(kind, []).append(path)
    return grouped


def format_output(options, pattern, results):
    """Render one output line (without newline) for ``pattern``."""
    grouped = group_results(results)
    if options.search_bin or options.search_man or options.search_src:
        wanted = [
            kind
            for kind, enabled in (
                (DirType.BINARY, options.search_bin),
                (DirType.MANUAL, options.search_man),
                (DirType.SOURCE, options.search_src),
            )
            if enabled
        ]
        paths: Iterable[str] = (p for kind in wanted for p in grouped.get(kind, []))
    else:
        paths = (p for group in grouped.values() for p in group)
    return f"{pattern}:" + "".join(f" {p}" for p in paths)


def build_parser():
    """Create the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="whereis",
        description="Locate the binary, source, and manual page files for a command.",
    )
    parser.add_argument("names", nargs="+", help="The name of the program [s] to search for.")
    parser.add_argument("-b", "--binaries", dest="search_bin", action="store_true",
                        help="Search for binaries.")
    parser.add_argument("-m", "--manual", dest="search_man", action="store_true",
                        help="Search for manuals.")
    parser.add_argument("-s", "--source", dest="search_src", action="store_true",
                        help="Search for sources.")
    parser.add_argument("-B", "--bins", dest="search_specific_bin", action="store_true",
                        help="Limit the places where whereis searches for binaries, "
                             "by a whitespace-separated list of directories.")
    parser.add_argument("-M", "--mans", dest="search_specific_man", action="store_true",
                        help="Limit the places where whereis searches for manuals and "
                             "documentation in Info format, by a whitespace-separated "
                             "list of directories.")
    parser.add_argument("-S", "--sources", dest="search_specific_src", action="store_true",
                        help="Limit the places where whereis searches for sources, by a "
                             "whitespace-separated list of directories.")
    parser.add_argument("-u", dest="path_given", action="store_true",
                        help="Only show the command names that have unusual entries.")
    return parser


def _default_dir_list() -> WhDirList:
    dir_list = WhDirList()
    dir_list.construct_dir_list(DirType.BINARY, BIN_DIRS)
    dir_list.construct_dir_list(DirType.MANUAL, MAN_DIRS)
    dir_list.construct_dir_list(DirType.SOURCE, SRC_DIRS)
    return dir_list


def main(argv=None):
    """Run the command; returns the exit status."""
    args = build_parser().parse_args(argv)
    options = OutputOptions(
        search_bin=args.search_bin,
        search_man=args.search_man,
        search_src=args.search_src,
        path_given=args.path_given,
        search_specific_bin=args.search_specific_bin,
        search_specific_man=args.search_specific_man,
        search_specific_src=args.search_specific_src,
    )
    dir_list = _default_dir_list()
    for pattern in args.names:
        results = [
            path
            for kind in (DirType.BINARY, DirType.MANUAL, DirType.SOURCE)
            for path in dir_list.lookup(pattern, kind)
        ]
        print(format_output(options, pattern, results))
    return 0


if __name__ == "__main__":
    sys.exit(main())