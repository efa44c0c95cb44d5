"""
Setup script for user-directory
"""

from setuptools import setup, find_packages
import pathlib

# Read the README file
HERE = pathlib.Path(__file__).parent
README = (HERE / "README.md").read_text(encoding="utf-8")

setup(
    name="user-directory",
    version="0.1.0",
    description="Embedded HTTP service exposing a read-only user directory as JSON",
    long_description=README,
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "fastapi==0.115.12",
        "pydantic==2.11.5",
        "pydantic-settings==2.12.0",
        "structlog>=24.1.0",
        "uvicorn==0.34.3",
    ],
    extras_require={
        "test": [
            "httpx>=0.27.0",
            "pytest>=8.0.0",
            "pytest-asyncio>=0.23.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "user-directory=user_directory.main:entry_point",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "License :: OSI Approved :: MIT License",
    ],
    keywords="http json user-directory fastapi",
)
