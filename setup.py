"""Scientific Calculator - keyboard-driven calculator with history."""
from setuptools import setup, find_packages

setup(
    name="scientific-calculator",
    version="1.0.0",
    description="Two-operand scientific calculator with keyboard bindings and history",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "click>=8.1.0",
        "rich>=13.0.0",
        "questionary>=2.0.0",
        "toml>=0.10.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "scicalc=scicalc.cli:main",
        ],
    },
    python_requires=">=3.10",
)
