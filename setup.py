import os

from setuptools import find_packages, setup


def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname)).read()


long_description = read("README.md") if os.path.isfile("README.md") else ""

setup(
    name="arbprobe",
    version="1.0",
    description="Read-only diagnostics for Arbitrum JSON-RPC endpoints",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.10",
    ],
    keywords="ethereum arbitrum json-rpc",
    python_requires=">=3.10,<4",
    install_requires=read("requirements.txt").strip().split("\n"),
    extras_require={
        "dev": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "arbprobe=arbprobe.cli:cli",
        ],
    },
)
