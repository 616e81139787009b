#!python


__project__ = "peptidesieve"
__version__ = "0.1.0"
__license__ = "Apache"
__description__ = "Result records for proteotypic peptide predictability scores"
__keywords__ = [
    "bioinformatics",
    "proteomics",
    "proteotypic peptides",
]
__python_version__ = ">=3.10"
__classifiers__ = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "License :: OSI Approved :: Apache Software License",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]
