import re
from pathlib import Path

from setuptools import setup, find_packages

_VERSION_FILE = Path(__file__).parent / "src" / "verbosity" / "_version.py"
VERSION = re.search(r'^__version__ = "([^"]+)"',
                    _VERSION_FILE.read_text(encoding="utf-8"), re.M).group(1)

setup(
    name="verbosity",
    version=VERSION,
    description="Process-wide Quiet/Terse/Verbose reporting level for command-line tools",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[],
    extras_require={
        "test": ["pytest", "pytest-cov"],
    },
    entry_points={
        "console_scripts": [
            "verbosity=verbosity.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Environment :: Console",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.10",
)
