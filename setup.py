"""
Setup configuration for the oasrouter package.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="oasrouter",
    version="0.1.0",
    author="oasrouter Contributors",
    author_email="contributors@oasrouter.example.com",
    description="Declare HTTP routes once and generate a validated OpenAPI document for any routing library",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/yourusername/oasrouter",
    packages=find_packages(exclude=["tests", "tests.*", "examples", "examples.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Internet :: WWW/HTTP",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.9",
    install_requires=requirements,
    extras_require={
        "starlette": ["starlette>=0.27.0"],
        "flask": ["flask>=2.2.0"],
        "dev": [
            "pytest>=6.0",
            "pytest-cov",
            "ruff",
            "mypy",
            "httpx",
            "starlette>=0.27.0",
            "flask>=2.2.0",
        ],
        "examples": ["uvicorn", "starlette>=0.27.0", "flask>=2.2.0"],
    },
    project_urls={
        "Bug Reports": "https://github.com/yourusername/oasrouter/issues",
        "Source": "https://github.com/yourusername/oasrouter",
    },
)
