""" bip66 build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import bip66

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=bip66.name,
    version=bip66.__version__,
    license=bip66.__license__,
    author=bip66.__author__,
    author_email=bip66.__author_email__,
    description="Strict DER (BIP66) encoding of ECDSA signatures",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=["dataclasses_json"],
    extras_require={"tests": ["pytest"]},
    keywords="bitcoin ecdsa signature der bip66 malleability",
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
