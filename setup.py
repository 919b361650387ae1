# setup.py

import setuptools

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="docscraper",
    version="0.1.0",
    description="A Playwright-driven documentation site crawler and content extractor",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests*", "*.tests", "*.tests.*", "examples*"]),
    include_package_data=True,
    install_requires=[
        "pydantic>=2.0.0",
        "playwright>=1.30.0",
        "beautifulsoup4>=4.9.1",
        "colorlog>=6.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
        ],
    },
    python_requires=">=3.9",
    license="MIT",
    classifiers=[
        "Programming Language :: Python :: 3.9",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    entry_points={
        "console_scripts": [
            "docscraper=docscraper.cli:run",
        ],
    },
)
