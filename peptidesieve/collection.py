import logging
from collections.abc import Iterable, Iterator

import numpy as np
import pandas as pd

from peptidesieve import reporting  # noqa: F401 registers Logger.progress
from peptidesieve.constants.keys import ResultCols, ScoreCols
from peptidesieve.exceptions import MalformedResultTableError, ResultNotFoundError
from peptidesieve.result import ProteotypicResult

logger = logging.getLogger()


class ProteotypicResultCollection:
    """Ordered in-memory collection of proteotypic results.

    Results are kept in the order they were added. Several results for the same protein and peptide
    are kept side by side, the collection never merges them.

    Parameters
    ----------

    results : Iterable[ProteotypicResult], optional
        Results to add on construction.
    """

    def __init__(self, results: Iterable[ProteotypicResult] | None = None) -> None:
        self._results: list[ProteotypicResult] = []
        if results is not None:
            self.extend(results)

    def append(self, result: ProteotypicResult) -> None:
        self._results.append(result)
        logger.debug(
            f"Added result for protein '{result.protein}' peptide '{result.peptide}'"
        )

    def extend(self, results: Iterable[ProteotypicResult]) -> None:
        for result in results:
            self.append(result)

    def __len__(self) -> int:
        return len(self._results)

    def __iter__(self) -> Iterator[ProteotypicResult]:
        return iter(self._results)

    def __getitem__(self, index: int) -> ProteotypicResult:
        return self._results[index]

    def find(
        self, protein: str | None = None, peptide: str | None = None
    ) -> list[ProteotypicResult]:
        """Return all results matching the given protein and peptide.

        Parameters
        ----------

        protein : str, optional
            Protein to match. If None, results of any protein match.

        peptide : str, optional
            Peptide to match. If None, results of any peptide match.

        Returns
        -------
        list[ProteotypicResult]
            Matching results in insertion order.
        """
        return [
            result
            for result in self._results
            if (protein is None or result.protein == protein)
            and (peptide is None or result.peptide == peptide)
        ]

    def get(self, protein: str, peptide: str) -> ProteotypicResult:
        """Return the first result for the exact protein and peptide pair.

        Raises
        ------
        ResultNotFoundError
            If the collection holds no result for the pair.
        """
        for result in self._results:
            if result.protein == protein and result.peptide == peptide:
                return result
        raise ResultNotFoundError(protein, peptide)

    @property
    def score_names(self) -> list[str]:
        """Names of all scores set on any result, in the order they were first seen."""
        names = {}
        for result in self._results:
            for name in result.score_names:
                names.setdefault(name, None)
        return list(names)

    def to_df(self) -> pd.DataFrame:
        """Build a table with one row per result.

        The table holds the protein and peptide columns followed by one float column per score name.
        Score columns are named `score.<score name>`, so any score name can be stored next to the
        identity columns. Scores missing for a result are NaN.

        Returns
        -------
        pd.DataFrame
            Result table in insertion order.
        """
        score_names = self.score_names
        score_columns = [ScoreCols.PREFIX + name for name in score_names]

        data = {
            ResultCols.PROTEIN: [result.protein for result in self._results],
            ResultCols.PEPTIDE: [result.peptide for result in self._results],
        }
        for name, column in zip(score_names, score_columns):
            data[column] = np.array(
                [result.scores.get(name, np.nan) for result in self._results],
                dtype=np.float64,
            )

        logger.progress(
            f"Built result table with {len(self._results)} rows and {len(score_names)} scores"
        )
        return pd.DataFrame(data, columns=ResultCols.get_values() + score_columns)

    @classmethod
    def from_df(cls, df: pd.DataFrame) -> "ProteotypicResultCollection":
        """Create a collection from a table as built by `to_df`.

        Every `score.<score name>` column is read as a score, other columns besides protein and
        peptide are ignored. Missing protein or peptide cells become empty strings, other values are
        converted to `str`.

        The conversion is lossy for NaN: NaN cells are not set, so a score stored as NaN on purpose
        is absent from the restored result.

        Parameters
        ----------

        df : pd.DataFrame
            Result table with protein and peptide columns.

        Returns
        -------
        ProteotypicResultCollection
            One result per row.

        Raises
        ------
        MalformedResultTableError
            If the protein or peptide column is missing.
        """
        identity_columns = ResultCols.get_values()
        missing_columns = [col for col in identity_columns if col not in df.columns]
        if missing_columns:
            raise MalformedResultTableError(missing_columns)

        score_columns = {
            col: col[len(ScoreCols.PREFIX) :]
            for col in df.columns
            if isinstance(col, str) and col.startswith(ScoreCols.PREFIX)
        }
        ignored_columns = [
            col
            for col in df.columns
            if col not in identity_columns and col not in score_columns
        ]
        if ignored_columns:
            logger.warning(f"Ignoring columns without score prefix: {ignored_columns}")

        collection = cls()
        for _, row in df.iterrows():
            result = ProteotypicResult(
                protein=_identity_value(row[ResultCols.PROTEIN]),
                peptide=_identity_value(row[ResultCols.PEPTIDE]),
            )
            for column, name in score_columns.items():
                if not pd.isna(row[column]):
                    result.set_score(name, row[column])
            collection.append(result)

        return collection


def _identity_value(value) -> str:
    if pd.isna(value):
        return ""
    return str(value)
