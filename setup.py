from setuptools import setup, find_packages
import re

with open("README.md", "r") as readme:
    long_description = readme.read()

# https://stackoverflow.com/a/7071358
VERSION = "Unknown"
VERSION_RE = r"^__version__ = ['\"]([^'\"]*)['\"]"

with open("number_range/version.py") as f:
    match = re.search(VERSION_RE, f.read())
    if match:
        VERSION = match.group(1)
    else:
        raise RuntimeError("Unable to find version string in number_range/version.py")

setup(
    name="number-range",
    version=VERSION,
    description="Parses human readable number ranges like 1,3:10,14 into the "
        "numbers they cover, and compresses numbers back into the shortest "
        "such notation.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Operating System :: OS Independent",
    ],
    keywords = ["number range, range notation, parser, cli arguments"],
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.7",
    install_requires=[
        "numpy"
    ],
    extras_require={
        "test": [
            "pytest"
        ]
    }
)
