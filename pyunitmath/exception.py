"""
Exceptions raised by :mod:`pyunitmath`.  Every failure of the engine is
one of the classes below, so callers can catch the whole family using
``UnitError`` or pick out a single kind of failure.
"""


# Written by the pyunitmath developers, October 2026.

# ======================================================================

class UnitError(Exception):
    """
    Base class for all errors raised when parsing, building or
    operating on units.

    Notes
    -----
    Subclasses may carry additional attributes (e.g. ``text``,
    ``position``) giving further details of the failure.
    """

    def __init__(self, *args, **kwargs):
        """
        Parameters
        ----------
        args :
            Passed to `Exception`.
        kwargs :
            Additional attributes can be added to the object using
            keyword arguments.
        """
        super().__init__(*args)
        for k, v in kwargs.items():
            setattr(self, k, v)

    def __str__(self):
        """Add additional details below the main failure notice."""
        error_str = super().__str__()
        for k, v in self.__dict__.items():
            if v is not None:
                error_str += f"\n{k} -> {v!r}"
        return error_str


# ----------------------------------------------------------------------

class UnitSyntaxError(UnitError, ValueError):
    """
    A unit string could not be parsed.  The offending string is given
    by attribute `text` and the cursor offset where the problem was
    detected by `position`.
    """

    def __init__(self, *args, text: str = None, position: int = None,
                 **kwargs):
        super().__init__(*args, text=text, position=position, **kwargs)


class UnitNotFoundError(UnitSyntaxError):
    """
    A unit string referred to a unit `name` that is not registered
    (with or without a prefix).
    """

    def __init__(self, *args, name: str = None, **kwargs):
        super().__init__(*args, name=name, **kwargs)


class UnitTypeError(UnitError, TypeError):
    """An argument was of the wrong type or shape."""
    pass


class DimensionError(UnitError, ValueError):
    """The dimensions of the units involved are not compatible."""
    pass


class MissingValueError(UnitError, ValueError):
    """The operation requires a unit that carries a numeric value."""
    pass


class UnitConfigError(UnitError, ValueError):
    """
    Options, unit definitions or the numeric type are invalid.  These
    are raised when building a unit factory and the factory is never
    partially built.
    """
    pass
