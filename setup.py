"""setup.py for entrobench.

Pure-Python package; the codecs come from zlib/gzip in the standard library
plus the lz4 and zstandard bindings.
"""

import os

from setuptools import find_packages, setup


def _read_version():
    """Read __version__ from entrobench/__init__.py without importing it."""
    init_path = os.path.join(os.path.dirname(os.path.abspath(__file__)),
                             "entrobench", "__init__.py")
    with open(init_path) as f:
        for line in f:
            if line.startswith("__version__"):
                return line.split("=", 1)[1].strip().strip('"').strip("'")
    raise RuntimeError("Unable to find __version__")


setup(
    name="entrobench",
    version=_read_version(),
    description="Benchmark general-purpose compressors against entropy-controlled synthetic data",
    packages=find_packages(exclude=["tests", "tests.*", "scripts"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.22",
        "lz4>=4.0",
        "zstandard>=0.19",
        "rich>=12.0",
        "pandas>=1.4",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "entrobench=entrobench.__main__:main",
        ],
    },
)
