# setup.py
from setuptools import setup, find_packages

setup(
    name="taxcanon",
    version="0.3.0",
    description="Canonical seven-rank taxonomy tables from NCBI taxonomy dumps",
    author="taxcanon Contributors",
    packages=find_packages(exclude=["tests", "tests.*"]),
    entry_points={
        "console_scripts": [
            "taxcanon=taxcanon.cli:main",
        ],
    },
    install_requires=[
        "pandas>=1.4",
    ],
    extras_require={
        "test": [
            "pytest>=7",
        ],
    },
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
    ],
)
