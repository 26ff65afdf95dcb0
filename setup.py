from setuptools import setup, find_packages

setup(
    name="rpgcore",
    version="0.1.0",
    packages=find_packages(include=["rpgcore", "rpgcore.*"]),
    python_requires=">=3.8",
    install_requires=[
        "PySide6",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
)
