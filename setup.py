from setuptools import setup, find_packages

setup(
    name="bentfour",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["run"],
    install_requires=[
        "numpy",
        "gymnasium",  # Environment wrapper around the board
    ],
    extras_require={
        "test": ["pytest"],
    },
)
