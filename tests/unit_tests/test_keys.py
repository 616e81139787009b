import pytest

from peptidesieve.constants.keys import ResultCols, ScoreCols


def test_result_cols_values():
    assert ResultCols.get_values() == ["protein", "peptide"]


def test_result_cols_cannot_be_modified():
    with pytest.raises(TypeError):
        ResultCols.PROTEIN = "protein_name"


def test_score_cols_prefix_not_an_identity_column():
    assert ScoreCols.PREFIX == "score."
    assert ScoreCols.PREFIX not in ResultCols.get_values()
