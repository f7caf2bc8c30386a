from setuptools import setup, find_packages


setup(
    name="greeter",
    version="0.1.0",
    description="Tiny greeter with a swappable name source (hello/goodbye CLI)",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pydantic>=2.7",
        "pydantic-settings>=2.3",
        "typer>=0.12",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
        ]
    },
    entry_points={
        "console_scripts": [
            "greeter=greeter.cli:app",
        ]
    },
    python_requires=">=3.10",
)
