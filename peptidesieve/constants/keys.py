class ConstantsClass(type):
    """A metaclass for classes that should only contain string constants."""

    def __setattr__(self, name, value):
        raise TypeError("Constants class cannot be modified")

    def get_values(cls):
        """Get all user-defined string values of the class."""
        return [
            value
            for key, value in cls.__dict__.items()
            if not key.startswith("__") and isinstance(value, str)
        ]


class ResultCols(metaclass=ConstantsClass):
    """String constants for the identity columns of the tabular result view."""

    PROTEIN = "protein"
    PEPTIDE = "peptide"


class ScoreCols(metaclass=ConstantsClass):
    """String constants for the score columns of the tabular result view."""

    # score columns are named <prefix><score name>
    PREFIX = "score."
