# setup.py
from setuptools import setup, find_packages

setup(
    name="raycore",
    version="0.1.0",
    description="Numeric core of a software ray tracer: tuples, matrices, colors, PPM canvas",
    packages=find_packages(include=["raycore", "raycore.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
        "Pillow>=9.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
