# setup.py
from setuptools import setup, find_packages

setup(
    name="robots_forge",
    version="0.1.0",
    description="Генератор, валидатор и тестер правил robots.txt RobotsForge",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"robots_forge.report": ["templates/*.j2"]},
    install_requires=[
        "click>=8.1",
        "pydantic>=2.0",
        "PyYAML>=6.0",
        "Jinja2>=3.1",
    ],
    extras_require={
        "test": ["pytest>=7.0,<9.1"],
    },
    entry_points={
        "console_scripts": ["robots-forge=robots_forge.cli:cli"],
    },
    python_requires=">=3.11",
)
