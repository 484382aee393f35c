# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="codesummary",
    version="1.0.0",
    description="Generate directory trees and LLM-powered codebase analyses from the command line",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["codesummary", "codesummary.*"]),
    python_requires=">=3.9",
    install_requires=[
        "requests",
        "python-dotenv",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'codesummary=codesummary.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
