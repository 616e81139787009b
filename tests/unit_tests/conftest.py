import os
import tempfile

import numpy as np

from peptidesieve.result import ProteotypicResult

AMINO_ACIDS = list("ACDEFGHIKLMNPQRSTVWY")


def mock_results(
    n_results: int = 10,
    score_names: list[str] | None = None,
    n_proteins: int = 3,
) -> list[ProteotypicResult]:
    """Create mock results as a scoring step would hand them over

    Parameters
    ----------

    n_results : int
        Number of results to generate

    score_names : list[str], optional
        Scores to set on every result, default ["SVMClassifier", "RandomForest"]

    n_proteins : int
        Number of distinct proteins the results are spread across

    Returns
    -------

    results : list[ProteotypicResult]
        Results with unique peptides and random scores in [0, 1)
    """
    if score_names is None:
        score_names = ["SVMClassifier", "RandomForest"]

    protein_names = [f"P{10000 + i}" for i in range(n_proteins)]

    results = []
    for i in range(n_results):
        # index suffix keeps peptides unique
        peptide = "".join(np.random.choice(AMINO_ACIDS, 8)) + "K" * (i + 1)
        result = ProteotypicResult(
            protein=protein_names[i % n_proteins], peptide=peptide
        )
        for name in score_names:
            result.set_score(name, np.random.rand())
        results.append(result)

    return results


def random_tempfolder():
    """Create a randomly named temp folder in the system temp folder

    Returns
    -------
    path : str
        Path to the created temp folder

    """
    tempdir = tempfile.gettempdir()
    # 6 alphanumeric characters
    random_foldername = "peptidesieve_" + "".join(
        np.random.choice(list("abcdefghijklmnopqrstuvwxyz0123456789"), 6)
    )
    path = os.path.join(tempdir, random_foldername)
    os.makedirs(path, exist_ok=True)
    return path
