"""
Setup script for the confscout package.
"""

from setuptools import setup, find_packages

setup(
    name="confscout",
    version="1.0.0",
    description="Application configuration finder: searches the folder tree for configuration files in any supported format",
    author="Confscout Team",
    packages=find_packages(include=["confscout", "confscout.*"]),
    python_requires=">=3.11",
    install_requires=[
        # Configuration formats
        "PyYAML>=6.0",

        # Non-blocking filesystem access
        "aiofiles>=23.1.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.21.0",
            "pytest-cov>=4.1.0",
            "black>=23.0.0",
            "flake8>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "confscout=confscout.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
