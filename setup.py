# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="prefn",
    version="0.1.0",
    description="Prefix arithmetic interpreter with single-argument functions",
    packages=find_namespace_packages(include=["prefn", "prefn.*"]),
    python_requires=">=3.10",
    install_requires=[
        "termcolor",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["prefn=prefn.cli:main"],
    },
    zip_safe=False,
)
