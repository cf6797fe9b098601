#!/usr/bin/env python

from setuptools import setup, find_packages

with open("termgrid/_version.py") as f:
    exec(f.read())

CLASSIFIERS = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "License :: OSI Approved :: MIT License",
    "Operating System :: OS Independent",
    "Programming Language :: Python",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: Implementation :: CPython",
    "Programming Language :: Python :: Implementation :: PyPy",
    "Topic :: Terminals",
    "Topic :: Text Processing",
]

REQUIREMENTS = ["click>=7.0", "setuptools", "wcwidth>=0.1.7"]

setup(
    classifiers=CLASSIFIERS,
    description="Arrange text in to grids for display in a terminal",
    entry_points={"console_scripts": ["termgrid = termgrid.commands:termgrid"]},
    install_requires=REQUIREMENTS,
    extras_require={"test": ["pytest"]},
    license="MIT",
    name="termgrid",
    packages=find_packages(exclude=("tests", "examples")),
    package_data={"termgrid": ["py.typed"]},
    python_requires=">=3.6",
    zip_safe=False,
    platforms=["any"],
    version=__version__,
)
