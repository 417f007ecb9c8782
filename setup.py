"""Setup configuration for neo-permissions package."""

from setuptools import setup, find_packages
from pathlib import Path

# Read version from __version__.py
version = {}
with open("src/neo_permissions/__version__.py") as fp:
    exec(fp.read(), version)

# Read README for long description
readme_path = Path(__file__).parent / "README.md"
long_description = readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""

setup(
    name="neo-permissions",
    version=version["__version__"],
    description="Permission policy engine for NeoMultiTenant services",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="NeoFast Team",
    author_email="team@neofast.com",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
            "pre-commit>=3.0.0",
        ],
        "test": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "pytest-mock>=3.11.0",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Security",
        "Topic :: Software Development :: Libraries :: Application Frameworks",
    ],
    keywords="authorization permissions multi-tenant ddd domain-events",
    project_urls={
        "Documentation": "https://github.com/your-org/neo-permissions",
        "Source": "https://github.com/your-org/neo-permissions",
        "Tracker": "https://github.com/your-org/neo-permissions/issues",
    },
)
