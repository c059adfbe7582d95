import os

import pytest

from whereloc import whereis
from whereloc.whereis import (
    DirType,
    OutputOptions,
    WhDir,
    WhDirList,
    filename_equal,
    find_in,
    format_output,
    group_results,
    whereis_type_to_name,
)


@pytest.mark.parametrize(
    "dir_type, name",
    [
        (DirType.MANUAL, "man"),
        (DirType.BINARY, "bin"),
        (DirType.SOURCE, "src"),
        (DirType.UNKNOWN, "???"),
    ],
)
def test_type_names(dir_type, name):
    assert whereis_type_to_name(dir_type) == name


def test_filename_equal_binary_exact():
    assert filename_equal("ls", "ls", DirType.BINARY) is True
    assert filename_equal("ls", "ls.1", DirType.BINARY) is False
    assert filename_equal("ls", "lsblk", DirType.BINARY) is False


def test_filename_equal_manual_section_and_compression():
    for suffix in (".Z", ".gz", ".xz", ".bz2", ".zst"):
        assert filename_equal("ls", "ls.1" + suffix, DirType.MANUAL) is True
    assert filename_equal("ls", "ls.gz", DirType.MANUAL) is True
    assert filename_equal("ls", "lsx.1", DirType.MANUAL) is False


def test_filename_equal_source_sccs_prefix():
    assert filename_equal("foo", "s.foo.c", DirType.SOURCE) is True
    assert filename_equal("foo", "s.bar.c", DirType.SOURCE) is False


def test_filename_equal_uses_final_component():
    assert filename_equal("/some/dir/ls", "ls", DirType.BINARY) is True
    assert filename_equal("", "ls", DirType.BINARY) is False


def test_whdir_create_missing(tmp_path):
    d = WhDir.create(tmp_path / "missing", DirType.BINARY)
    assert d.stat is None
    assert d.dir_type is DirType.BINARY


def test_add_dir_dedups_by_inode(tmp_path):
    real = tmp_path / "real"
    real.mkdir()
    link = tmp_path / "link"
    os.symlink(real, link)
    dirs = WhDirList()
    dirs.add_dir(WhDir.create(real, DirType.BINARY))
    dirs.add_dir(WhDir.create(link, DirType.BINARY))
    dirs.add_dir(WhDir.create(real, DirType.BINARY))
    dirs.add_dir(WhDir.create(tmp_path / "nope", DirType.BINARY))
    assert [d.path for d in dirs] == [real]


def test_construct_dir_list_with_glob(tmp_path):
    for name in ("b", "a"):
        (tmp_path / name).mkdir()
    (tmp_path / "file").write_text("x")
    dirs = WhDirList()
    dirs.construct_dir_list(DirType.MANUAL, [str(tmp_path / "*")])
    assert [d.path.name for d in dirs] == ["a", "b"]
    assert all(d.dir_type is DirType.MANUAL for d in dirs)


def test_remove_dir(tmp_path):
    (tmp_path / "a").mkdir()
    dirs = WhDirList()
    entry = WhDir.create(tmp_path / "a", DirType.SOURCE)
    dirs.add_dir(entry)
    dirs.remove_dir(entry)
    assert len(dirs) == 0


def test_find_in_and_lookup(tmp_path):
    bindir = tmp_path / "bin"
    mandir = tmp_path / "man1"
    bindir.mkdir()
    mandir.mkdir()
    (bindir / "tool").write_text("")
    (bindir / "tool.sh").write_text("")
    (mandir / "tool.1.gz").write_text("")
    assert find_in(bindir, "tool", DirType.BINARY) == [str(bindir / "tool")]
    assert find_in(tmp_path / "missing", "tool", DirType.BINARY) == []

    dirs = WhDirList()
    dirs.construct_dir_list(DirType.BINARY, [str(bindir)])
    dirs.construct_dir_list(DirType.MANUAL, [str(mandir)])
    assert dirs.lookup("tool", DirType.MANUAL) == [str(mandir / "tool.1.gz")]
    assert dirs.lookup("tool", DirType.SOURCE) == []


def test_group_results():
    results = ["/usr/bin/ls", "/usr/share/man/man1/ls.1.gz", "/usr/src/ls"]
    grouped = group_results(results)
    assert grouped[DirType.BINARY] == ["/usr/bin/ls"]
    assert grouped[DirType.MANUAL] == ["/usr/share/man/man1/ls.1.gz"]
    assert grouped[DirType.SOURCE] == ["/usr/src/ls"]


def test_format_output_filters():
    results = ["/usr/bin/ls", "/usr/share/man/man1/ls.1.gz", "/usr/src/ls"]
    assert format_output(OutputOptions(search_bin=True), "ls", results) == "ls: /usr/bin/ls"
    assert (
        format_output(OutputOptions(search_man=True, search_src=True), "ls", results)
        == "ls: /usr/share/man/man1/ls.1.gz /usr/src/ls"
    )
    everything = format_output(OutputOptions(), "ls", results)
    assert sorted(everything.split()[1:]) == sorted(results)
    assert format_output(OutputOptions(), "ls", []) == "ls:"


def test_main_prints_matches(tmp_path, monkeypatch, capsys):
    bindir = tmp_path / "bin"
    bindir.mkdir()
    (bindir / "prog").write_text("")
    monkeypatch.setattr(whereis, "BIN_DIRS", (str(bindir),))
    monkeypatch.setattr(whereis, "MAN_DIRS", ())
    monkeypatch.setattr(whereis, "SRC_DIRS", ())
    assert whereis.main(["prog", "other"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [f"prog: {bindir / 'prog'}", "other:"]


def test_main_requires_names():
    with pytest.raises(SystemExit):
        whereis.main([])


def test_parser_flags():
    args = whereis.build_parser().parse_args(["-b", "-u", "x"])
    assert args.search_bin is True
    assert args.path_given is True
    assert args.search_man is False
    assert args.names == ["x"]