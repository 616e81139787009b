"""Module containing custom exceptions."""


class CustomError(Exception):
    """Custom peptidesieve error class."""

    _error_code = ""
    _msg = ""
    _detail_msg = ""
    _user_msg = ""

    @property
    def error_code(self):
        return self._error_code

    @property
    def msg(self):
        return self._msg

    @property
    def detail_msg(self):
        return self._detail_msg

    def __init__(self, msg: str = ""):
        self._user_msg = msg

        super().__init__(self._msg)

    def __str__(self):
        return (
            f"{self._error_code}: {self._msg}\n'{self._user_msg}'\n{self._detail_msg}"
        )


class BusinessError(CustomError):
    """Custom error class for 'business' errors.

    A 'business' error is an error that is caused during processing the input (results, tables, ...) and not by a
    malfunction in peptidesieve.
    """


class ScoreNotFoundError(BusinessError, KeyError):
    """Raise when a score is looked up under a name that was never set on a result."""

    _error_code = "SCORE_NOT_FOUND"

    _msg = "No score stored under the requested name."

    def __init__(self, name: str, protein: str = "", peptide: str = ""):
        super().__init__(name)
        self.name = name
        self._detail_msg = f"score='{name}', protein='{protein}', peptide='{peptide}'"


class ResultNotFoundError(BusinessError, KeyError):
    """Raise when no result exists for a protein/peptide pair."""

    _error_code = "RESULT_NOT_FOUND"

    _msg = "No result stored for the requested protein and peptide."

    def __init__(self, protein: str, peptide: str):
        super().__init__(f"{protein}/{peptide}")
        self._detail_msg = f"protein='{protein}', peptide='{peptide}'"


class MalformedResultTableError(BusinessError):
    """Raise when a result table lacks the protein or peptide column."""

    _error_code = "MALFORMED_RESULT_TABLE"

    _msg = "Result table is missing identity columns."

    def __init__(self, missing_columns: list[str]):
        super().__init__(", ".join(missing_columns))
        self._detail_msg = f"Missing columns: {missing_columns}"
