from setuptools import setup, find_packages

setup(
    name="algo-katas",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "numpy>=1.24.0",
        "pandas>=2.0.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    description="Algorithmic katas: compass points, brace expansion, zigzag matrix, domino rows, range extraction",
    python_requires=">=3.10",
)
