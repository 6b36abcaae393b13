from setuptools import setup, find_packages

setup(
    name="folio",
    version="0.1.0",
    description="Assemble ordered markdown chapters into a navigable static site",
    package_dir={"": "src"},
    packages=find_packages(where="src", include=["folio", "folio.*"]),
    include_package_data=True,
    package_data={
        "folio": ["templates/*.html"],
        "folio.config": ["default.yaml"],
    },
    install_requires=[
        "structlog>=23.1.0",
        "pydantic>=2.0.0",
        "typer>=0.9.0",
        "pyyaml>=6.0.1",
        "aiofiles>=23.2.1",
        "python-dotenv>=1.0.0",
        "jinja2>=3.1.0",
        "markdown>=3.5",
        "rich>=13.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.21.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "folio=folio.cli:main",
        ],
    },
    python_requires=">=3.9",
)
