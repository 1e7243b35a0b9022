"""Exceptions raised for malformed input."""


class InputError(ValueError):
    """A store or batch file could not be loaded.

    Business-rule violations are never raised; they are reported as
    ConflictInfo values. This covers files that cannot be read as phrases or
    batch items at all.
    """

    def __init__(self, source: str, problems: list[str]):
        self.source = source
        self.problems = problems
        details = "; ".join(problems)
        super().__init__(f"Invalid input in {source}: {details}")
