from setuptools import setup, find_packages
from pathlib import Path

long_description = (Path(__file__).parent / "README.md").read_text("utf-8")

setup(
    name="itemizer",
    description="Bidirectional interning table mapping values to dense integer ids",
    version="0.1.0",
    install_requires=["attrs>=19.2"],
    extras_require={"test": ["pytest"]},
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.7",
    license="Apache-2.0",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
    ],
    long_description=long_description,
    long_description_content_type="text/markdown",
)
