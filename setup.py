#!/usr/bin/env python3

from setuptools import setup, find_packages
import os


directory = os.path.dirname(os.path.realpath(__file__))


if __name__ == "__main__":
    setup(
        name="explodeview",
        packages=find_packages(include=["explodeview", "explodeview.*"]),
        python_requires='>3.10.0',
        version="0.1.0",
        license="MIT",
        description="Animated exploded-assembly model of a window unit",
        author="mirmik",
        author_email="mirmikns@yandex.ru",
        long_description=open(os.path.join(
            directory, "README.md"), "r", encoding="utf8").read(),
        long_description_content_type="text/markdown",
        keywords=["animation", "cad", "exploded view"],
        classifiers=[],
        include_package_data=True,
        install_requires=[
            "numpy",
        ],
        extras_require={
            "test": [
                "pytest",
            ],
            "docs": [
                "sphinx",
                "myst-parser",
                "sphinx-book-theme",
            ],
        },
        zip_safe=False,
    )
