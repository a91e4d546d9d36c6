from setuptools import setup, find_namespace_packages

setup(
    name="d2r",
    version="0.1.0",
    packages=find_namespace_packages(where="src", include=["d2r", "d2r.*"]),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[
        "pydantic>=2.0",
        "click>=8.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "d2r=d2r.CLI.main:main",
        ],
    },
)
