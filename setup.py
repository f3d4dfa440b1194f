"""
Setup script for clplot, a command line plotting utility.
"""

from setuptools import setup, find_packages

setup(
    name="clplot",
    version="0.1.0",
    description="Draw points, lines, rectangles and text on the command line",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="clplot contributors",
    license="GPL-3.0-or-later",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "rich>=13.0.0",
        "pydantic>=2.0.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "hypothesis>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "clplot=clplot.main:cli",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
