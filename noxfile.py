# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
import nox

SRC_DIRS = [
    "pyfstab",
]


@nox.session
def tests(session: nox.Session) -> None:
    session.install("-r", "dev-requirements.txt")
    session.run(
        "pytest",
        "--doctest-modules",
        "-n",
        "auto",
        *SRC_DIRS,
        *session.posargs,
    )


@nox.session
def lint(session: nox.Session) -> None:
    session.install("-r", "dev-requirements.txt")
    session.run(
        "flake8",
        "--max-line-length=120",
        *SRC_DIRS,
    )


@nox.session
def format(session: nox.Session) -> None:
    session.install("-r", "dev-requirements.txt")
    session.run(
        "ufmt",
        "check",
        *SRC_DIRS,
    )


@nox.session
def typecheck(session: nox.Session) -> None:
    session.install("-r", "dev-requirements.txt")
    session.run("mypy", *SRC_DIRS)
