
from setuptools import setup, find_packages

setup(
    name="outer_gomoku",
    version="0.1",
    description="Outer-Open Gomoku engine with alpha-beta search",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
