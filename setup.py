""" ecfield build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import ecfield

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=ecfield.name,
    version=ecfield.__version__,
    license=ecfield.__license__,
    author=ecfield.__author__,
    author_email=ecfield.__author_email__,
    description="Prime field arithmetic and elliptic curve point validation",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[],
    extras_require={
        "tests": ["pytest"],
        "docs": ["sphinx", "myst-parser", "sphinx-rtd-theme"],
    },
    keywords="elliptic-curves finite-fields modular-arithmetic cryptography",
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Scientific/Engineering",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
