"""
Setup script for quiz-trainer.

Quiz Trainer is a terminal quiz companion. It serves two roles:

1. Quiz Manager - Add, edit, delete and browse question/answer pairs
2. Play Mode - Answer every stored quiz in random order until the first miss

The 'quiz' command is the entry point; run it without arguments for the
interactive shell.
"""

from setuptools import find_packages, setup

setup(
    name="quiz-trainer",
    version="1.0.0",
    description="Interactive command-line quiz trainer",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    author="Marcos Notario",
    packages=find_packages(include=["src", "src.*"]),
    py_modules=["config"],
    python_requires=">=3.10",
    install_requires=[
        # CLI
        "typer>=0.9.0",
        "rich>=13.0.0",
        # Database
        "sqlalchemy>=2.0.0",
        # Config & Validation
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        # Logging
        "loguru>=0.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
            "pytest-cov>=4.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "quiz=src.cli.main:app",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
    ],
    keywords="quiz cli education trivia",
)
