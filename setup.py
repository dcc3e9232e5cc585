# setup.py
from setuptools import setup, find_packages

setup(
    name="nlisp",
    version="0.1.0",
    description="A small Lisp interpreter with closures, vectors, maps and atoms",
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "nlisp=nlisp.repl:main",
        ],
    },
    zip_safe=False,
)
