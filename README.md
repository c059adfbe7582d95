# whereloc

Find the binary, source and manual page files for one or more command names.

`whereloc` searches a fixed list of standard directories, such as `/usr/bin`,
`/usr/share/man/*` and `/usr/src/*`. It expands the entries that contain
wildcards, skips directories that do not exist, and skips directories that
resolve to the same file on disk (the same device and inode). It matches files
by name:

- binaries must match the name exactly;
- manual pages and sources also match when the name is followed by a `.`
  suffix, for example a section such as `ls.1`;
- manual pages may also end in a compression extension (`.gz`, `.xz`, `.bz2`,
  `.zst`, `.Z`);
- source files may carry an `s.` prefix.

## Installation

```
pip install .
```

## Command line

```
whereis [-b] [-m] [-s] NAME...
```

The same command can be started with `python -m whereloc.whereis`.

Each name produces one line of output:

```
$ whereis ls
ls: /usr/bin/ls /usr/share/man/man1/ls.1.gz
```

Options:

- `-b`, `--binaries`: show binaries only
- `-m`, `--manual`: show manual pages only
- `-s`, `--source`: show sources only

If none of `-b`, `-m` or `-s` is given, every match is shown.

Matches are placed in output groups by their path:

- a path containing `/bin/` is a binary;
- a path containing `/man` is a manual page;
- any other path is a source.

## Library use

```python
from whereloc.whereis import DirType, WhDirList, OutputOptions, format_output
from whereloc.constants import BIN_DIRS, MAN_DIRS

dirs = WhDirList()
dirs.construct_dir_list(DirType.BINARY, BIN_DIRS)
dirs.construct_dir_list(DirType.MANUAL, MAN_DIRS)

results = dirs.lookup("ls", DirType.BINARY) + dirs.lookup("ls", DirType.MANUAL)
print(format_output(OutputOptions(search_bin=True), "ls", results))
```

The module `whereloc.whereis` provides:

- `WhDir.create(path, dir_type)`: builds a search directory and reads its
  metadata.
- `WhDirList`: an ordered set of search directories. It has the methods
  `construct_dir_list`, `add_dir`, `remove_dir`, `add_sub_dirs` and `lookup`.
- `filename_equal(cp, dp, dir_type)`: the name-matching rule on its own.
- `find_in(directory, pattern, dir_type)`: returns the matching entries of one
  directory.
- `group_results(results)`: sorts result paths into binary, manual and source
  groups.
- `format_output(options, pattern, results)`: renders one output line without
  the trailing newline.
- `whereis_type_to_name(dir_type)`: gives `bin`, `man`, `src` or `???`.
- `build_parser()` and `main(argv)`: run the command with an explicit argument
  list.

`whereloc.constants` holds the default directory lists `BIN_DIRS`, `MAN_DIRS`
and `SRC_DIRS`.

## Limitations

The options `-B` (`--bins`), `-M` (`--mans`), `-S` (`--sources`) and `-u` are
accepted as plain flags, but they do not change the output:

- `-B`, `-M` and `-S` take no directory list, so you cannot change the
  directories that are searched.
- `-u` does not filter names with unusual entries.

There is no support for searching the `PATH` environment variable.

## Running the tests

```
pip install .[test]
pytest
```