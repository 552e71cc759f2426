# setup.py
from setuptools import setup, find_packages

setup(
    name="malt",
    version="0.1.0",
    description="A small Lisp read-eval-print interpreter",
    packages=find_packages(include=["malt", "malt.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["malt=malt.__main__:main"],
    },
    zip_safe=False,
)
