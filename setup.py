import itertools
import re
import os

from setuptools import find_namespace_packages, setup

dependencies = ["click", "gffutils", "marshmallow>=3.13,<4", "marshmallow_dataclass"]

with open(os.path.join(os.path.dirname(__file__), "inscripta", "codonmap", "__init__.py")) as v_file:
    VERSION = re.compile(r""".*__version__ = ["'](.*?)['"]""", re.S).match(v_file.read()).group(1)

extra_dependencies = {
    "test": ["biopython", "black", "flake8", "pytest", "pytest-cov"],
}

all_dependencies = list(itertools.chain.from_iterable(extra_dependencies.values()))
extra_dependencies["all"] = all_dependencies

with open(os.path.join(os.path.dirname(__file__), "README.md"), "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="CodonMap",
    description="Bidirectional mapping between genomic positions and protein positions of a transcript.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="Inscripta, Inc.",
    packages=find_namespace_packages(include=["inscripta.*"]),
    include_package_data=True,
    tests_require=extra_dependencies["test"],
    extras_require=extra_dependencies,
    install_requires=dependencies,
    entry_points={"console_scripts": ["codonmap=inscripta.codonmap.cli:main"]},
    version=VERSION,
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
