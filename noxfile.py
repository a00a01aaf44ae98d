import nox

PYTHON_VERSIONS = ["3.11", "3.12", "3.13"]

nox.options.sessions = ["tests"]


def _install(session: nox.Session, *extras: str) -> None:
    """Install groove and its test group with poetry into the nox virtualenv."""
    args = ["poetry", "install", "--with", "test"]
    for extra in extras:
        args.extend(["--extras", extra])
    session.run(*args, external=True)


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.Session) -> None:
    """Run full test suite across Python versions."""
    _install(session)
    session.run("pytest", *session.posargs)


@nox.session(python=PYTHON_VERSIONS[-1])
def tests_domain(session: nox.Session) -> None:
    """Run aggregate-level tests only (no HTTP layer, no gateway)."""
    _install(session)
    session.run("pytest", "-m", "domain", *session.posargs)


@nox.session(python=PYTHON_VERSIONS[-1])
def tests_api(session: nox.Session) -> None:
    """Run the HTTP tests against the FastAPI routers."""
    _install(session)
    session.run("pytest", "-m", "integration", *session.posargs)


@nox.session(python=PYTHON_VERSIONS[-1])
def tests_bdd(session: nox.Session) -> None:
    """Run the balance checkout scenarios."""
    _install(session)
    session.run("pytest", "-m", "bdd", *session.posargs)


@nox.session(python=PYTHON_VERSIONS[-1])
def tests_postgres(session: nox.Session) -> None:
    """Run the suite against PostgreSQL (``--env postgres`` selects the domain.toml overlay)."""
    _install(session, "postgresql")
    session.run("pytest", "--env", "postgres", *session.posargs)
