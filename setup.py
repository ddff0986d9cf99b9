# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="jam-interpreter",
    version="0.3.0",
    description="Jam evaluator with call-by-value/name/need bindings and eager/lazy cons",
    packages=find_namespace_packages(include=["jam", "jam.*"]),
    python_requires=">=3.10",
    install_requires=[
        "termcolor",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["jam=jam.cli:main"],
    },
    zip_safe=False,
)
