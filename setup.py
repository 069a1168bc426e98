from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="dinicflow",
    version="0.1.0",
    description="Dinic maximum-flow on dense capacitated directed graphs.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*", "dev", "dev.*")),
    python_requires=">=3.9",
    install_requires=["numpy", "networkx"],
    extras_require={"dev": ["pytest"]},
    entry_points={"console_scripts": ["dinicflow=dinicflow.cli:main"]},
)
