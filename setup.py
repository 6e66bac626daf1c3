import setuptools
from pathlib import Path

with Path("README.md").open(encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="daygrid",
    version="0.1.0",
    author="DayGrid developers",
    description="Overlap-aware layout engine for day-view calendars",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    install_requires=[
        "pandas>=2.0.0",
        "numpy>=1.20.0",
        "matplotlib>=3.3.0",
    ],
    extras_require={
        "test": ["pytest>=7.0", "hypothesis>=6.0"],
    },
    packages=setuptools.find_packages(),
    entry_points={
        "console_scripts": [
            "daygrid=daygrid.__main__:main",
        ],
    },
    python_requires=">=3.8",
)
