from setuptools import find_packages, setup

setup(
    name="lazyseq",
    version="0.1.0",
    description="Immutable, lazy, possibly infinite sequences and a persistent list",
    packages=find_packages(include=["lazyseq", "lazyseq.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest"],
    },
)
