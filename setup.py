#!/usr/bin/env python3
"""
Setup script for lemmapipe
"""

from pathlib import Path

from setuptools import find_packages, setup

# Read README for long description
readme_file = Path(__file__).parent / "README.md"
long_description = ""
if readme_file.exists():
    long_description = readme_file.read_text(encoding='utf-8')

# Read version from lemmapipe/__init__.py
version = "1.0.0"
init_file = Path(__file__).parent / "lemmapipe" / "__init__.py"
if init_file.exists():
    for line in init_file.read_text(encoding='utf-8').split('\n'):
        if line.startswith('__version__'):
            version = line.split('=')[1].strip().strip('"').strip("'")
            break

BASE_REQUIREMENTS = [
    "langcodes>=3.3.0",
    "pycountry>=23.12.0",
    "tabulate>=0.9.0",
    "PyStemmer>=2.2.0",
    "phunspell>=0.1.6",
]

EXTRAS = {
    "test": ["pytest>=7.0.0"],
}

EXTRAS["dev"] = sorted(
    set(
        EXTRAS["test"]
        + [
            "black>=22.0.0",
            "flake8>=4.0.0",
        ]
    )
)


setup(
    name="lemmapipe",
    version=version,
    description="Dictionary-first lemmatizer with Snowball stemming and Hunspell spell-checking fallbacks",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        "lemmapipe": ["dicts/*.lmm"],
    },
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=BASE_REQUIREMENTS,
    extras_require=EXTRAS,
    entry_points={
        "console_scripts": [
            "lemmapipe=lemmapipe.__main__:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Topic :: Text Processing :: Linguistic",
    ],
    keywords="nlp, lemmatization, stemming, spell-checking, universal-pos",
    zip_safe=False,
)
