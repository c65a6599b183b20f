""" ctlib build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import ctlib

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=ctlib.name,
    version=ctlib.__version__,
    license=ctlib.__license__,
    author=ctlib.__author__,
    author_email=ctlib.__author_email__,
    description="Twisted ElGamal encryption of confidential amounts",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    # install_requires=[],
    extras_require={"test": ["pytest"]},
    keywords=(
        "cryptography elliptic-curves ed25519 twisted-elgamal "
        "homomorphic-encryption pedersen-commitment confidential-transfer"
    ),
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
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
