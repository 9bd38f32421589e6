#!/usr/bin/env python
# encoding: utf-8
from setuptools import setup
import io

setup(
    name="textgridreader",
    python_requires=">3.6.0",
    version="1.0.0",
    package_dir={"textgridreader": "textgridreader"},
    packages=[
        "textgridreader",
        "textgridreader.utilities",
        "textgridreader.data_classes",
    ],
    install_requires=[
        "typing_extensions",
    ],
    extras_require={
        "test": ["pytest"],
    },
    description=(
        "A line-oriented reader for praat textgrid files that builds "
        "a file, tier and entry tree or streams each field to a listener."
    ),
    long_description=io.open("README.md", "r", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
)
