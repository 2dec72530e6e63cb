from setuptools import setup, find_packages

setup(
    name="subtitle-toolkit",
    version="0.1.0",
    description="Clean, join and transcribe SRT subtitle files",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "subtitle-toolkit=subtitle_toolkit.cli:main",
        ],
    },
)
