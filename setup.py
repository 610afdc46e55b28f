# setup.py
from setuptools import setup, find_packages

setup(
    name="robots_txt",
    version="0.1.0",
    description="Парсер robots.txt и проверка доступа по User-Agent",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"robots_txt": ["templates/*.j2"]},
    install_requires=[
        "aiohttp>=3.9",
        "click>=8.1",
        "pydantic>=2.0",
        "PyYAML>=6.0",
        "Jinja2>=3.1",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "robots-txt=robots_txt.cli:cli",
        ],
    },
    python_requires=">=3.11",
)
