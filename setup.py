"""Setup configuration for cvrisk package."""
from setuptools import setup, find_packages

setup(
    name="cvrisk",
    version="0.1.0",
    description="Cardiovascular risk scores (SCORE2, Framingham, ACC/AHA, PROCAM, REACH, TRA2P, INVEST)",
    packages=find_packages(where=".", exclude=["tests", "tests.*"]),
    package_dir={"": "."},
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "pandas",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
