from setuptools import setup, find_packages

setup(
    name="meshdata",
    version="0.1.0",
    description="An in-memory data model for unstructured meshes and time-varying simulation datasets.",
    license="GPL-3.0",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",

    # Package discovery
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={"meshdata": ["bin/*.yaml"]},

    # Python version requirement
    python_requires=">=3.11",

    # Core dependencies
    install_requires=[
        "numpy>=2.1.1",
        "ruamel.yaml>=0.18",
    ],

    # Test dependencies
    extras_require={
        "test": [
            "pytest>=8.3.4",
        ],
    },
)
