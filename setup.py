# kosutils - setup code

import os
import re

from setuptools import setup, find_packages

here = os.path.abspath(os.path.dirname(__file__))


def version_from_package():
    with open(os.path.join(here, "src", "kosutils", "__init__.py")) as fd:
        return re.search(r'^__version__ = "([^"]+)"', fd.read(), re.M).group(1)


def long_desc_from_readme():
    with open(os.path.join(here, "README.rst")) as fd:
        long_description = fd.read()
        # remove header, but have one \n before first headline
        start = long_description.find("What is kosutils?")
        assert start >= 0
        long_description = "\n" + long_description[start:]
        # remove badges
        long_description = re.compile(r"^\.\. start-badges.*^\.\. end-badges", re.M | re.S).sub("", long_description)
        return long_description


install_requires = [
    "packaging",
    "platformdirs >=3.0.0, <5.0.0",
]

extras_require = {
    "test": [
        "pytest",
    ],
}

setup(
    name="kosutils",
    version=version_from_package(),
    description="Small helpers: cached uid/gid name resolution, byte formatting, URI redaction and more",
    long_description=long_desc_from_readme(),
    long_description_content_type="text/x-rst",
    license="BSD-3-Clause",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=install_requires,
    extras_require=extras_require,
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "Operating System :: POSIX",
        "Operating System :: Microsoft :: Windows",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Libraries",
        "Topic :: Utilities",
    ],
)
