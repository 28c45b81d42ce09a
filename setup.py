from setuptools import setup, find_packages

setup(
    name="rectquad",
    version="0.1.0",
    description="Right-rectangle quadrature with the partition count derived from a derivative bound",
    author="rectquad contributors",
    packages=find_packages(include=["rectquad", "rectquad.*"]),
    install_requires=[
        "matplotlib",
        "pandas",
        "sympy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "rectquad=rectquad.cli:main",
        ],
    },
    include_package_data=True,
    python_requires=">=3.11",
)
