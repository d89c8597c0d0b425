"""
Setup script for pysatl-transport.
"""

from setuptools import find_packages, setup

setup(
    name="pysatl-transport",
    version="0.1.0",
    description=(
        "Tabulated 1D distributions, Monte-Carlo p-Wasserstein distance and "
        "quantile-space interpolation"
    ),
    author="Leonid Elkin, Mikhail Mikhailov",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.12",
    install_requires=[
        "numpy>=1.26",
        "scipy>=1.11",
        "mypy-extensions>=1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
        ],
    },
)
