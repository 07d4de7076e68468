from setuptools import setup, find_packages

setup(
    name="connect4-arcade",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy",
        "gymnasium",  # headless environment over the engine
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.8",
)
