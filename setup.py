"""Configuration for the mlopt package."""

from setuptools import setup, find_packages


setup(
    name="mlopt",
    version="0.1.0",
    description="Adam and AdaMax optimization of decomposable objective functions",
    packages=find_packages(),
    install_requires=[
        "numpy>=1.24.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.10",
    zip_safe=False,
)
