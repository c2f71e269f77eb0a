"""codarrays -- Arrays of compositional data"""
from setuptools import find_packages, setup

setup(
    name="codarrays",
    version="0.1.0",
    description="Arrays of compositional data built from the columns of tables.",
    python_requires=">=3.9",
    packages=find_packages(include=["codarrays", "codarrays.*"]),
    install_requires=[
        "numpy>=1.21",
        "monty>=2022.9.9",
    ],
    extras_require={
        "pandas": ["pandas>=1.3"],
        "test": ["pytest", "pytest-cov", "pandas>=1.3"],
    },
)
