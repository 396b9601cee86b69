# setup.py
from setuptools import setup, find_packages

setup(
    name="lispy",
    version="0.1.0",
    description="A small S-expression language with closures, currying and error values",
    packages=find_packages(include=["lispy", "lispy.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pyparsing>=3.0",
        "loguru>=0.7",
        "prompt_toolkit>=3.0",
        "typer>=0.9",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": ["lispy=lispy.cli:main"],
    },
    zip_safe=False,
)
