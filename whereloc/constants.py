"""Default directories searched for binaries, manual pages and sources."""


def _under(root: str, *names: str) -> tuple[str, ...]:
    """Join each name onto ``root``, keeping the given order."""
    return tuple(f"{root}/{name}" for name in names)


MAN_DIRS: tuple[str, ...] = _under(
    "/usr",
    "man/*",
    "share/man/*",
    "X386/man/*",
    "X11/man/*",
    "TeX/man/*",
    "interviews/man/mann",
    "share/info",
)

SRC_DIRS: tuple[str, ...] = _under(
    "/usr/src",
    "*",
    "lib/libc/*",
    "lib/libc/net/*",
    "ucb/pascal",
    "ucb/pascal/utilities",
    "undoc",
)

BIN_DIRS: tuple[str, ...] = (
    _under("/usr", "bin", "sbin")
    + _under("", "bin", "sbin")
    + _under("/usr", "lib", "lib32", "lib64")
    + _under("", "etc")
    + _under("/usr", "etc")
    + _under("", "lib", "lib32", "lib64")
    + _under(
        "/usr",
        "games",
        "games/bin",
        "games/lib",
        "emacs/etc",
        "lib/emacs/*/etc",
        "TeX/bin",
        "tex/bin",
        "interviews/bin/LINUX",
        "X11R6/bin",
        "X386/bin",
        "bin/X11",
        "X11/bin",
        "X11R5/bin",
    )
    + _under(
        "/usr/local",
        "bin",
        "sbin",
        "etc",
        "lib",
        "games",
        "games/bin",
        "emacs/etc",
        "TeX/bin",
        "tex/bin",
        "bin/X11",
    )
    + _under(
        "/usr",
        "contrib",
        "hosts",
        "include",
        "g++-include",
        "ucb",
        "old",
        "new",
        "local",
        "libexec",
        "share",
    )
    + _under("/opt", "*/bin")
)