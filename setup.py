from setuptools import setup, find_packages

setup(
    name="pybuildzig",
    description="Build zig libraries from cargo build scripts",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="Loris Kriyonas",
    author_email="loris.kriyonas@gmail.com",
    keywords=["zig", "cargo", "build"],
    python_requires=">=3.11",
    packages=find_packages(exclude=("tests",)),
    install_requires=[
        "returns>=0.19",
        "toml>=0.10",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "pybuildzig = pybuildzig.main:main",
        ]
    },
    setup_requires=[
        "setuptools>=42",
        "setuptools_scm>=3.5",
    ],
    use_scm_version={"fallback_version": "0.1.0"},
)
