# setup.py
from setuptools import setup, find_packages

setup(
    name="crawl_cache",
    version="0.1.0",
    description="Async HTTP fetcher with a file-backed page cache",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "aiohttp>=3.9",
        "pydantic>=2.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    python_requires=">=3.11",
)
