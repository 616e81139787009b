"""Result record of a proteotypic peptide prediction.

A `ProteotypicResult` identifies one peptide of one protein and carries the scores that one or more
predictors assigned to it. Records are filled incrementally by the scoring step and read by whatever
reports on them. The record performs no validation of its own.
"""

from types import MappingProxyType

from peptidesieve.exceptions import ScoreNotFoundError


class ProteotypicResult:
    """Protein, peptide and named prediction scores of a single peptide.

    Parameters
    ----------

    protein : str, default ""
        Name of the parent protein. An empty string is a valid value.

    peptide : str, default ""
        Peptide sequence. An empty string is a valid value.

    Notes
    -----
    Equality is not defined beyond object identity. Callers that need to compare results should
    compare the `(protein, peptide)` pair.
    """

    def __init__(self, protein: str = "", peptide: str = "") -> None:
        self.protein = protein
        self.peptide = peptide
        self._scores: dict[str, float] = {}

    @property
    def scores(self) -> MappingProxyType:
        """Read-only view of the score mapping, score name to value."""
        return MappingProxyType(self._scores)

    @property
    def score_names(self) -> list[str]:
        """Names of the scores set on this result, in insertion order."""
        return list(self._scores)

    def set_score(self, name: str, value: float) -> None:
        """Store `value` under `name`, replacing any previous value for that name.

        Parameters
        ----------

        name : str
            Name of the scoring method, e.g. the classifier that produced the value.

        value : float
            Score value. Negative values and NaN are stored as given.
        """
        self._scores[name] = float(value)

    def get_score(self, name: str) -> float:
        """Return the score stored under `name`.

        Raises
        ------
        ScoreNotFoundError
            If no score was set under `name`.
        """
        try:
            return self._scores[name]
        except KeyError:
            raise ScoreNotFoundError(name, self.protein, self.peptide) from None

    def has_score(self, name: str) -> bool:
        """Return True if a score was set under `name`."""
        return name in self._scores

    def __contains__(self, name: str) -> bool:
        return self.has_score(name)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(protein={self.protein!r}, "
            f"peptide={self.peptide!r}, scores={self._scores!r})"
        )
