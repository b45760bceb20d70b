from setuptools import find_packages, setup

setup(
    name="termlink",
    version="0.1.0",
    description="Terminal link detection and cross-platform local path resolution",
    packages=find_packages(include=["termlink", "termlink.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Configuration models and command output schemas
        "typer<0.26",  # CLI framework; 0.26+ vendors its own click, hiding the context from click.get_current_context
        "click",  # Context lookup for CLI display format
        "rich",  # Terminal formatting
        "pyyaml",  # YAML output format
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
        ],
    },
    entry_points={
        "console_scripts": [
            "termlinkc=termlink.cli.main:main",
        ],
    },
)
