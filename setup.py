# setup.py
from setuptools import setup, find_packages

setup(
    name="toylisp",
    version="0.1.0",
    description="Line-oriented interpreter for a minimal Lisp",
    packages=find_packages(include=["toylisp", "toylisp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "termcolor",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["toylisp=toylisp.__main__:main"],
    },
    zip_safe=False,
)
