"""Store-level error taxonomy.

Every constraint in the schema is enforced by the database engine. When a
write is rejected the driver raises a ``sqlalchemy.exc.DBAPIError`` subclass
(usually ``IntegrityError``); the data-access layer rolls back and re-raises
one of the classes below so callers never have to inspect driver-specific
payloads.
"""
import re

from sqlalchemy.exc import DBAPIError, IntegrityError


class ClinicDataError(Exception):
    def __init__(self, message: str, constraint: str | None = None):
        super().__init__(message)
        self.message = message
        self.constraint = constraint


class UniquenessViolation(ClinicDataError):
    """Duplicate value for a unique column or the (doctor_id, appointment_datetime) pair."""


class CheckConstraintViolation(ClinicDataError):
    """Negative cost, non-positive duration, negative experience or no contact method."""


class ForeignKeyViolation(ClinicDataError):
    """Reference to a missing parent row, or a delete blocked by ON DELETE RESTRICT."""


class RequiredFieldMissing(ClinicDataError):
    """A NOT NULL column was omitted."""


class RecordNotFound(ClinicDataError):
    def __init__(self, entity: str, id: int):
        super().__init__(f"{entity} {id} not found")
        self.entity = entity
        self.id = id


# MySQL server error codes (pymysql / aiomysql put them in args[0])
_MYSQL_CODES = {
    1062: UniquenessViolation,
    3819: CheckConstraintViolation,
    1451: ForeignKeyViolation,
    1452: ForeignKeyViolation,
    1216: ForeignKeyViolation,
    1217: ForeignKeyViolation,
    1048: RequiredFieldMissing,
    1364: RequiredFieldMissing,
}

# PostgreSQL SQLSTATE class 23
_SQLSTATES = {
    "23505": UniquenessViolation,
    "23514": CheckConstraintViolation,
    "23503": ForeignKeyViolation,
    "23001": ForeignKeyViolation,
    "23502": RequiredFieldMissing,
}

# SQLite only reports text
_SQLITE_PREFIXES = (
    ("UNIQUE constraint failed", UniquenessViolation),
    ("CHECK constraint failed", CheckConstraintViolation),
    ("FOREIGN KEY constraint failed", ForeignKeyViolation),
    ("NOT NULL constraint failed", RequiredFieldMissing),
)

_CONSTRAINT_RE = re.compile(r"\b((?:uq|ck|fk)_[A-Za-z0-9_]+)")


def _constraint_name(text: str) -> str | None:
    m = _CONSTRAINT_RE.search(text)
    return m.group(1) if m else None


def _sqlite_target(text: str) -> str | None:
    # "UNIQUE constraint failed: patients.email"
    if ":" in text:
        return text.split(":", 1)[1].strip().splitlines()[0] or None
    return None


def translate_db_error(exc: DBAPIError) -> ClinicDataError | None:
    """Map a driver error onto the taxonomy above.

    pymysql raises some constraint failures (3819 check violated, 1364 no
    default) as ``OperationalError`` rather than ``IntegrityError``, so the
    whole ``DBAPIError`` family is inspected. Returns ``None`` for errors that
    are not constraint failures (lost connection, deadlock, ...); an
    unrecognised ``IntegrityError`` still becomes a plain ``ClinicDataError``.
    """
    orig = exc.orig
    text = str(orig) if orig is not None else str(exc)
    constraint = _constraint_name(text)

    args = getattr(orig, "args", ())
    if args and isinstance(args[0], int) and args[0] in _MYSQL_CODES:
        message = args[1] if len(args) > 1 else text
        return _MYSQL_CODES[args[0]](str(message), constraint)

    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate in _SQLSTATES:
        return _SQLSTATES[sqlstate](text, constraint)

    for prefix, cls in _SQLITE_PREFIXES:
        if prefix in text:
            return cls(text, constraint or _sqlite_target(text))

    if isinstance(exc, IntegrityError):
        return ClinicDataError(text, constraint)
    return None
